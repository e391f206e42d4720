"""Exceptions raised while allocating and writing files."""

from typing import Optional


class SaveFileError(Exception):
    """Base class for save failures."""

    pass


class AllocationExhausted(SaveFileError):
    """Raised when no free counter could be found within the attempt budget."""

    def __init__(self, base: str, attempts: int, start: Optional[int] = None):
        self.base = base
        self.attempts = attempts
        self.start = start
        if start is None:
            message = f'Could not find free filename for base "{base}" after {attempts} attempts.'
        else:
            message = (
                f'Could not find free filename for base "{base}" '
                f"after {attempts} attempts starting from {start}."
            )
        super().__init__(message)


class IOFailure(SaveFileError):
    """Raised for filesystem errors other than an already existing target."""

    def __init__(self, cause: OSError, message: Optional[str] = None):
        self.cause = cause
        super().__init__(message or f"Filesystem error: {cause}")


class MissingBinaryPropertyError(SaveFileError):
    """Raised when an input item has no binary data under the requested property."""

    def __init__(self, property_name: str, index: int):
        self.property_name = property_name
        self.index = index
        super().__init__(f"No binary property '{property_name}' found on item {index}.")
