"""Batch save command for item files."""

from pathlib import Path
from typing import Annotated, Any, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from savefile.batch import Item, SaveOptions, save_items
from savefile.config.settings import get_settings
from savefile.errors import SaveFileError
from savefile.utils.paths import resolve_path

console = Console()


def load_items(items_path: Path) -> list[Item]:
    """Load input items from a YAML or JSON file.

    The file holds either a list of items or a mapping with an ``items`` list.
    Each item has optional ``json`` and ``binary`` mappings.
    """
    data: Any = yaml.safe_load(items_path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError("expected a list of items")
    return [Item.model_validate(entry or {}) for entry in data]


def batch_cmd(
    items_file: Annotated[str, typer.Argument(help="YAML or JSON file with input items")],
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Destination folder (default: SAVEFILE_OUTPUT_DIR)"),
    ] = None,
    mode: Annotated[
        str,
        typer.Option("--mode", help="Input data mode: binary or text"),
    ] = "binary",
    binary_property: Annotated[
        str,
        typer.Option("--binary-property", help="Binary property to save in binary mode"),
    ] = "data",
    field: Annotated[
        str,
        typer.Option("--field", help="JSON field to save in text mode"),
    ] = "",
    base: Annotated[
        str,
        typer.Option("--base", help="Base name used for the {base} token"),
    ] = "file",
    ext: Annotated[
        str,
        typer.Option("--ext", help="File extension without the leading dot"),
    ] = "",
    overwrite: Annotated[
        Optional[bool],
        typer.Option("--overwrite/--no-overwrite", help="Replace the file for the start counter"),
    ] = None,
    continue_on_fail: Annotated[
        bool,
        typer.Option("--continue-on-fail", help="Keep going when an item fails"),
    ] = False,
) -> None:
    """Save every item of an items file."""
    from savefile.cli.main import state

    settings = get_settings()
    items_path = resolve_path(items_file)

    try:
        items = load_items(items_path)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        console.print(f"[red]Error:[/red] Failed to load items from {items_path}: {e}")
        raise typer.Exit(1)

    try:
        options = SaveOptions(
            folder_path=resolve_path(output) if output else settings.output_dir,
            input_mode=mode,
            binary_property=binary_property,
            data_field=field,
            base_name=base,
            extension=ext,
            pattern=settings.pattern,
            counter_start=settings.counter_start,
            counter_padding=settings.counter_padding,
            create_folders=settings.create_folders,
            overwrite=overwrite if overwrite is not None else settings.overwrite,
        )
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid options: {e}")
        raise typer.Exit(1)

    state.logger.info(f"Saving {len(items)} items to {options.folder_path}")
    try:
        results = save_items(
            items,
            options,
            continue_on_fail=continue_on_fail,
            settings=settings,
            logger=state.logger,
        )
    except (SaveFileError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    failed = 0
    for result in results:
        if result.error:
            failed += 1
            console.print(f"[yellow]![/yellow] Item {result.paired_item}: {result.error}")
        else:
            console.print(f"[green]✓[/green] Item {result.paired_item}: {result.saved_path}")

    console.print(f"Saved {len(results) - failed} of {len(results)} items")
    if failed:
        raise typer.Exit(1)
