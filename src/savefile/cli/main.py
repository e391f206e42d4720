"""Main Typer CLI application for savefile."""

import logging
import sys
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from savefile import __version__
from savefile.config.settings import get_settings

# Create the Typer app
app = typer.Typer(
    name="savefile",
    help="Save files into a folder under collision-free, numbered names.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()


# Global state for config
class State:
    debug: bool = False
    logger: logging.Logger = logging.getLogger("savefile")


state = State()


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("savefile")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    return logger


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"savefile {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """savefile CLI - Save payloads without clobbering existing files."""
    # Load .env file
    load_dotenv()

    state.debug = debug or get_settings().debug
    state.logger = setup_logging(state.debug)

    if state.debug:
        state.logger.debug("Debug mode enabled")


# Import and register subcommands
from savefile.cli.save import save_cmd, text_cmd
from savefile.cli.batch import batch_cmd

app.command(name="save")(save_cmd)
app.command(name="text")(text_cmd)
app.command(name="batch")(batch_cmd)


if __name__ == "__main__":
    app()
