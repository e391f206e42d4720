"""Counter allocation and collision-safe file writes.

Saving without overwrite happens in two steps:

1. Discovery: list the directory once and collect the counters already used
   by files matching the naming pattern. This snapshot is only a hint for
   the first candidate and may be stale by the time it is used.
2. Creation: open the candidate with exclusive create (``O_EXCL``). If
   another writer got there first, move to the next counter and try again.

Only step 2 guarantees that no two writers end up with the same path, so it
works across threads and processes sharing a filesystem without any lock.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from savefile.config.settings import Settings, get_settings
from savefile.errors import AllocationExhausted, IOFailure
from savefile.models import NamingConfig, SaveRequest
from savefile.utils.filename import counter_regex, format_filename
from savefile.utils.paths import ensure_folder

DEFAULT_MAX_ATTEMPTS = 10000
DEFAULT_MAX_RETRIES = 100

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def scan_existing_counters(
    directory: PathLike,
    pattern: str,
    base: str,
    extension: str,
) -> set[int]:
    """Collect counters already taken by files in ``directory``.

    Args:
        directory: Directory to list.
        pattern: Naming pattern.
        base: Base name.
        extension: Extension without leading dot.

    Returns:
        Set of counters found. Empty if the directory does not exist.

    Raises:
        IOFailure: If the directory exists but cannot be listed.
    """
    try:
        entries = os.listdir(directory)
    except FileNotFoundError:
        return set()
    except OSError as e:
        raise IOFailure(e, f"Could not list {directory}: {e}") from e

    file_regex = counter_regex(pattern, base, extension)
    existing: set[int] = set()
    for entry in entries:
        match = file_regex.match(entry)
        if match and match.lastindex:
            try:
                existing.add(int(match.group(1)))
            except ValueError:
                continue

    logger.debug(f"Found {len(existing)} existing counters for base '{base}' in {directory}")
    return existing


def find_next_available_counter(
    existing: set[int],
    start: int,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base: str = "",
) -> int:
    """Return the first counter at or after ``start`` that is not in ``existing``.

    Raises:
        AllocationExhausted: If ``max_attempts`` consecutive counters are taken.
    """
    counter = start
    while counter in existing and counter < start + max_attempts:
        counter += 1

    if counter >= start + max_attempts:
        raise AllocationExhausted(base, max_attempts, start=start)

    return counter


def create_file_atomically(
    directory: PathLike,
    config: NamingConfig,
    counter: int,
    payload: bytes,
) -> Path:
    """Create the file for ``counter`` and write ``payload`` into it.

    The file is opened with exclusive create, so ``FileExistsError`` is raised
    unchanged when the name is already taken. If writing fails after the file
    was created, the partial file is removed before the error is re-raised.

    Returns:
        Path of the written file.
    """
    filename = format_filename(
        config.pattern, config.base, counter, config.counter_padding, config.extension
    )
    file_path = Path(directory) / filename

    handle = file_path.open("xb")
    try:
        with handle:
            handle.write(payload)
    except OSError:
        try:
            file_path.unlink(missing_ok=True)
        except OSError as cleanup_error:
            logger.debug(f"Could not remove partial file {file_path}: {cleanup_error}")
        raise

    return file_path


def create_file(
    directory: PathLike,
    config: NamingConfig,
    start_counter: int,
    payload: bytes,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> Path:
    """Create a new file, advancing the counter whenever the name is taken.

    Args:
        directory: Target directory.
        config: Naming configuration.
        start_counter: First counter to try.
        payload: Bytes to write.
        max_retries: Number of counters to try.

    Returns:
        Path of the written file.

    Raises:
        AllocationExhausted: If every attempted name already existed.
        IOFailure: For any other filesystem error.
    """
    for attempt in range(max_retries):
        counter = start_counter + attempt
        try:
            file_path = create_file_atomically(directory, config, counter, payload)
        except FileExistsError:
            logger.debug(f"Counter {counter} for base '{config.base}' already taken, retrying")
            continue
        except OSError as e:
            raise IOFailure(e, f"Could not write file in {directory}: {e}") from e

        logger.info(f"Saved {len(payload)} bytes to {file_path}")
        return file_path

    raise AllocationExhausted(config.base, max_retries)


def write_overwrite(directory: PathLike, config: NamingConfig, payload: bytes) -> Path:
    """Write ``payload`` to the name for ``config.counter_start``, replacing any file."""
    filename = format_filename(
        config.pattern,
        config.base,
        config.counter_start,
        config.counter_padding,
        config.extension,
    )
    file_path = Path(directory) / filename

    try:
        with file_path.open("wb") as handle:
            handle.write(payload)
    except OSError as e:
        raise IOFailure(e, f"Could not write {file_path}: {e}") from e

    logger.info(f"Saved {len(payload)} bytes to {file_path} (overwrite)")
    return file_path


def save(
    directory: PathLike,
    config: NamingConfig,
    payload: bytes,
    overwrite: bool = False,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> Path:
    """Save ``payload`` into ``directory`` under a collision-free name.

    With ``overwrite`` the name for ``config.counter_start`` is written
    unconditionally and the last writer wins. Otherwise the directory is
    scanned for the first free counter and the file is created atomically,
    moving on to later counters if a concurrent writer took the name first.

    Args:
        directory: Target directory. It is not created here.
        config: Naming configuration.
        payload: Bytes to write.
        overwrite: Replace an existing file instead of allocating a new name.
        max_attempts: Limit on counters skipped during discovery.
        max_retries: Limit on exclusive-create attempts.

    Returns:
        Path of the written file.

    Raises:
        AllocationExhausted: If no free counter was found.
        IOFailure: For filesystem errors.
    """
    if overwrite:
        return write_overwrite(directory, config, payload)

    existing = scan_existing_counters(directory, config.pattern, config.base, config.extension)
    counter = find_next_available_counter(
        existing, config.counter_start, max_attempts, base=config.base
    )
    if counter != config.counter_start:
        logger.debug(f"Skipping to counter {counter} for base '{config.base}'")

    return create_file(directory, config, counter, payload, max_retries=max_retries)


def save_request(request: SaveRequest, *, settings: Optional[Settings] = None) -> Path:
    """Save a :class:`SaveRequest`, creating its directory first if requested.

    Args:
        request: The request to save.
        settings: Settings providing attempt limits (defaults to global settings).

    Returns:
        Path of the written file.
    """
    if settings is None:
        settings = get_settings()

    if request.create_folders:
        ensure_folder(request.directory)

    return save(
        request.directory,
        request.config,
        request.payload,
        request.overwrite,
        max_attempts=settings.max_attempts,
        max_retries=settings.max_retries,
    )
