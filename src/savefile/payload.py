"""Payload extraction for binary and text input items."""

from __future__ import annotations

import base64
import json
from pathlib import PurePath
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE = "file"
DEFAULT_BINARY_EXTENSION = "bin"
DEFAULT_TEXT_EXTENSION = "txt"
DEFAULT_JSON_EXTENSION = "json"


class BinaryData(BaseModel):
    """Base64 encoded binary data attached to an input item."""

    model_config = ConfigDict(populate_by_name=True)

    data: str
    file_name: Optional[str] = Field(default=None, alias="fileName")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")


def binary_to_bytes(binary: BinaryData) -> bytes:
    """Decode the base64 payload of ``binary``."""
    return base64.b64decode(binary.data)


def text_to_bytes(value: Any) -> tuple[bytes, str]:
    """Encode a text field value for writing.

    Strings are written as UTF-8 text. Any other value is serialized as
    indented JSON.

    Returns:
        Tuple of (payload, default extension).
    """
    if isinstance(value, str):
        return value.encode("utf-8"), DEFAULT_TEXT_EXTENSION
    return json.dumps(value, indent=2, ensure_ascii=False).encode("utf-8"), DEFAULT_JSON_EXTENSION


def resolve_binary_naming(
    file_name: Optional[str], base: str, extension: str
) -> tuple[str, str]:
    """Fill in a missing base name or extension from an original file name.

    Args:
        file_name: Original file name, if known.
        base: Base name given by the caller (may be empty).
        extension: Extension given by the caller (may be empty).

    Returns:
        Tuple of (base, extension).
    """
    original = PurePath(file_name) if file_name else None

    if not base:
        base = original.stem if original and original.stem else DEFAULT_BASE

    if not extension:
        if original is None:
            extension = DEFAULT_BINARY_EXTENSION
        else:
            extension = original.suffix[1:]

    return base, extension
