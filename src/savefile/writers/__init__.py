"""File writers for savefile."""

from savefile.writers.file_writer import (
    create_file,
    create_file_atomically,
    find_next_available_counter,
    save,
    save_request,
    scan_existing_counters,
    write_overwrite,
)

__all__ = [
    "create_file",
    "create_file_atomically",
    "find_next_available_counter",
    "save",
    "save_request",
    "scan_existing_counters",
    "write_overwrite",
]
