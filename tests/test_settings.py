from __future__ import annotations

from pathlib import Path

from savefile.config.settings import Settings, get_settings, reset_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.pattern == "{base}_{counter}"
    assert settings.counter_start == 1
    assert settings.counter_padding == 3
    assert settings.create_folders is True
    assert settings.overwrite is False
    assert settings.max_attempts == 10000
    assert settings.max_retries == 100


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SAVEFILE_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("SAVEFILE_MAX_RETRIES", "5")
    monkeypatch.setenv("SAVEFILE_OVERWRITE", "true")

    settings = get_settings()

    assert settings.output_dir == tmp_path / "out"
    assert settings.max_retries == 5
    assert settings.overwrite is True


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("SAVEFILE_PATTERN={base}-{counter}\n", encoding="utf-8")
    assert Settings().pattern == "{base}-{counter}"


def test_get_settings_is_cached_until_reset(monkeypatch) -> None:
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("SAVEFILE_COUNTER_START", "10")
    reset_settings()
    assert get_settings().counter_start == 10
    assert isinstance(get_settings().output_dir, Path)
