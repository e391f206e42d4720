"""Destination folder helpers."""

import os
from pathlib import Path
from typing import Optional, Union

from savefile.errors import IOFailure


def resolve_path(input_path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Expand ~ and environment variables in a folder path.

    Returns:
        Absolute Path, or None if the input is None or blank.
    """
    if not input_path:
        return None

    path_str = os.path.expandvars(str(input_path).strip())
    if not path_str:
        return None

    return Path(path_str).expanduser().resolve()


def ensure_folder(folder: Path) -> Path:
    """Create ``folder`` and any missing parents.

    Raises:
        IOFailure: If the folder cannot be created.
    """
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure(e, f"Could not create folder {folder}: {e}") from e
    return folder
