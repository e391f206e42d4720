"""Collision-free file saving with pattern-based counters."""

__version__ = "0.1.0"

from savefile.errors import AllocationExhausted, IOFailure, SaveFileError
from savefile.models import NamingConfig, SaveRequest
from savefile.utils.filename import format_filename, pad_counter, sanitize_filename
from savefile.writers.file_writer import save, save_request

__all__ = [
    "__version__",
    "AllocationExhausted",
    "IOFailure",
    "SaveFileError",
    "NamingConfig",
    "SaveRequest",
    "format_filename",
    "pad_counter",
    "sanitize_filename",
    "save",
    "save_request",
]
