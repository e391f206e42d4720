"""Single-payload save commands."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from savefile.config.settings import get_settings
from savefile.errors import SaveFileError
from savefile.models import NamingConfig, SaveRequest
from savefile.payload import resolve_binary_naming, text_to_bytes
from savefile.utils.filename import sanitize_filename
from savefile.utils.paths import resolve_path
from savefile.writers.file_writer import save_request

console = Console()

OutputOption = Annotated[
    Optional[str],
    typer.Option("--output", "-o", help="Destination folder (default: SAVEFILE_OUTPUT_DIR)"),
]
BaseOption = Annotated[
    Optional[str],
    typer.Option("--base", help="Base name used for the {base} token"),
]
ExtOption = Annotated[
    Optional[str],
    typer.Option("--ext", help="File extension without the leading dot"),
]
PatternOption = Annotated[
    Optional[str],
    typer.Option("--pattern", help="Filename pattern with {base} and {counter} tokens"),
]
StartOption = Annotated[
    Optional[int],
    typer.Option("--start", min=0, help="First counter value"),
]
PaddingOption = Annotated[
    Optional[int],
    typer.Option("--padding", min=0, help="Zero-padding width for the counter"),
]
OverwriteOption = Annotated[
    Optional[bool],
    typer.Option("--overwrite/--no-overwrite", help="Replace the file for the start counter"),
]
CreateFoldersOption = Annotated[
    Optional[bool],
    typer.Option("--create-folders/--no-create-folders", help="Create the destination folder"),
]


def _write(
    payload: bytes,
    base: str,
    extension: str,
    output: Optional[str],
    pattern: Optional[str],
    start: Optional[int],
    padding: Optional[int],
    overwrite: Optional[bool],
    create_folders: Optional[bool],
) -> None:
    """Build a request from CLI options, falling back to settings, and save it."""
    from savefile.cli.main import state

    settings = get_settings()
    directory = resolve_path(output) if output else settings.output_dir

    request = SaveRequest(
        directory=directory,
        config=NamingConfig(
            pattern=pattern if pattern is not None else settings.pattern,
            base=sanitize_filename(base),
            extension=extension,
            counter_start=start if start is not None else settings.counter_start,
            counter_padding=padding if padding is not None else settings.counter_padding,
        ),
        payload=payload,
        overwrite=overwrite if overwrite is not None else settings.overwrite,
        create_folders=create_folders if create_folders is not None else settings.create_folders,
    )

    state.logger.info(f"Saving {len(payload)} bytes to {directory}")
    try:
        saved_path = save_request(request, settings=settings)
    except SaveFileError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Saved {saved_path}")


def save_cmd(
    source: Annotated[str, typer.Argument(help="File to save, or - for stdin")],
    output: OutputOption = None,
    base: BaseOption = None,
    ext: ExtOption = None,
    pattern: PatternOption = None,
    start: StartOption = None,
    padding: PaddingOption = None,
    overwrite: OverwriteOption = None,
    create_folders: CreateFoldersOption = None,
) -> None:
    """Save a file's bytes under a numbered name."""
    if source == "-":
        payload = sys.stdin.buffer.read()
        file_name = None
    else:
        source_path = Path(source).expanduser()
        try:
            payload = source_path.read_bytes()
        except OSError as e:
            console.print(f"[red]Error:[/red] Failed to read {source_path}: {e}")
            raise typer.Exit(1)
        file_name = source_path.name

    base, extension = resolve_binary_naming(file_name, base or "", ext or "")
    _write(payload, base, extension, output, pattern, start, padding, overwrite, create_folders)


def text_cmd(
    value: Annotated[str, typer.Argument(help="Text to save")],
    output: OutputOption = None,
    base: BaseOption = None,
    ext: ExtOption = None,
    pattern: PatternOption = None,
    start: StartOption = None,
    padding: PaddingOption = None,
    overwrite: OverwriteOption = None,
    create_folders: CreateFoldersOption = None,
) -> None:
    """Save a text value under a numbered name."""
    payload, default_extension = text_to_bytes(value)
    _write(
        payload,
        base or "file",
        ext or default_extension,
        output,
        pattern,
        start,
        padding,
        overwrite,
        create_folders,
    )
