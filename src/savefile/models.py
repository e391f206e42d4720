"""Pydantic models describing save requests."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PATTERN = "{base}_{counter}"


class NamingConfig(BaseModel):
    """How filenames are built for one save.

    ``pattern`` supports one ``{base}`` and one ``{counter}`` token; only the
    first occurrence of each is substituted. A pattern without ``{counter}``
    yields a single candidate name.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = DEFAULT_PATTERN
    base: str = "file"
    extension: str = ""
    counter_start: int = Field(default=1, ge=0)
    counter_padding: int = Field(default=3, ge=0)

    @field_validator("extension", mode="before")
    @classmethod
    def strip_leading_dot(cls, v: object) -> object:
        """Accept ".pdf" as well as "pdf"."""
        if isinstance(v, str) and v.startswith("."):
            return v[1:]
        return v


class SaveRequest(BaseModel):
    """A single payload to be written into ``directory``."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    config: NamingConfig = Field(default_factory=NamingConfig)
    payload: bytes
    overwrite: bool = False
    create_folders: bool = True
