"""Utility functions for savefile."""

from savefile.utils.paths import ensure_folder, resolve_path
from savefile.utils.filename import counter_regex, format_filename, pad_counter, sanitize_filename

__all__ = [
    "ensure_folder",
    "resolve_path",
    "counter_regex",
    "format_filename",
    "pad_counter",
    "sanitize_filename",
]
