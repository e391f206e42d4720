"""Filename formatting and sanitization utilities."""

import re

# Characters replaced with "-" in generated filenames
INVALID_CHARS = re.compile(r'[/\\?%*:|"<>]')

BASE_TOKEN = "{base}"
COUNTER_TOKEN = "{counter}"

# Placeholder for the counter while building the discovery regex; never valid in a name
_COUNTER_SENTINEL = "\x00"


def sanitize_filename(name: str) -> str:
    """Replace invalid characters with "-" and trim surrounding whitespace.

    Args:
        name: The filename to sanitize.

    Returns:
        Sanitized filename, or an empty string for non-string input.
    """
    if not isinstance(name, str):
        return ""
    return INVALID_CHARS.sub("-", name).strip()


def pad_counter(counter: int, padding: int) -> str:
    """Left-pad a counter with zeros.

    A padding of 0 or less keeps the plain decimal representation. Counters
    wider than the padding are never truncated.
    """
    if not padding or padding <= 0:
        return str(counter)
    return str(counter).zfill(padding)


def format_filename(
    pattern: str,
    base: str,
    counter: int,
    padding: int,
    extension: str,
) -> str:
    """Build a filename from a pattern.

    Only the first occurrence of each token is substituted, so
    ``"{base}-{base}"`` becomes ``"report-{base}"``. The composed name is
    sanitized as a whole, which also cleans literal text in the pattern.

    Args:
        pattern: Pattern containing ``{base}`` and/or ``{counter}``.
        base: Value for the ``{base}`` token.
        counter: Value for the ``{counter}`` token.
        padding: Zero-padding width for the counter.
        extension: Extension without leading dot; empty for none.

    Returns:
        The sanitized filename.
    """
    name = pattern.replace(BASE_TOKEN, base, 1).replace(
        COUNTER_TOKEN, pad_counter(counter, padding), 1
    )
    name = sanitize_filename(name)
    return f"{name}.{extension}" if extension else name


def counter_regex(pattern: str, base: str, extension: str) -> re.Pattern:
    """Compile a regex matching filenames produced by ``pattern`` for ``base``.

    Group 1 captures the counter as ASCII digits. The name is composed and
    sanitized exactly like :func:`format_filename` before escaping, so literal
    pattern text matches the names actually written. Without a ``{counter}`` token
    the regex has no group.

    Args:
        pattern: Naming pattern.
        base: Base name.
        extension: Extension without leading dot; empty for none.

    Returns:
        Anchored compiled regex.
    """
    name = pattern.replace(BASE_TOKEN, base, 1).replace(
        COUNTER_TOKEN, _COUNTER_SENTINEL, 1
    )
    regex = re.escape(sanitize_filename(name)).replace(
        re.escape(_COUNTER_SENTINEL), r"([0-9]+)", 1
    )
    if extension:
        regex += r"\." + re.escape(extension)
    return re.compile(f"^{regex}\\Z")
