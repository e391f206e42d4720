"""Save a batch of input items, one file per item."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from savefile.config.settings import Settings
from savefile.errors import MissingBinaryPropertyError
from savefile.models import DEFAULT_PATTERN, NamingConfig, SaveRequest
from savefile.payload import (
    BinaryData,
    binary_to_bytes,
    resolve_binary_naming,
    text_to_bytes,
)
from savefile.utils.filename import sanitize_filename
from savefile.writers.file_writer import save_request

SAVED_PATH_KEY = "savedFilePath"


class Item(BaseModel):
    """An input item: JSON fields plus named binary attachments."""

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: dict[str, BinaryData] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class SaveOptions(BaseModel):
    """Options applied to every item in a batch."""

    folder_path: Path
    input_mode: Literal["binary", "text"] = "binary"
    binary_property: str = "data"
    data_field: str = ""
    base_name: str = "file"
    extension: str = ""
    pattern: str = DEFAULT_PATTERN
    counter_start: int = Field(default=1, ge=0)
    counter_padding: int = Field(default=3, ge=0)
    create_folders: bool = True
    overwrite: bool = False


class ItemResult(BaseModel):
    """Output for one processed item."""

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: dict[str, BinaryData] = Field(default_factory=dict)
    paired_item: int

    model_config = ConfigDict(populate_by_name=True)

    @property
    def saved_path(self) -> Optional[str]:
        return self.json_data.get(SAVED_PATH_KEY)

    @property
    def error(self) -> Optional[str]:
        return self.json_data.get("error")


def build_request(item: Item, index: int, options: SaveOptions) -> SaveRequest:
    """Turn one input item into a :class:`SaveRequest`.

    Raises:
        MissingBinaryPropertyError: In binary mode, if the item lacks the property.
    """
    base = options.base_name
    extension = options.extension

    if options.input_mode == "binary":
        binary = item.binary.get(options.binary_property)
        if binary is None:
            raise MissingBinaryPropertyError(options.binary_property, index)
        payload = binary_to_bytes(binary)
        base, extension = resolve_binary_naming(binary.file_name, base, extension)
    else:
        value = item.json_data.get(options.data_field, "")
        payload, default_extension = text_to_bytes(value)
        extension = extension or default_extension

    config = NamingConfig(
        pattern=options.pattern,
        base=sanitize_filename(base),
        extension=extension,
        counter_start=options.counter_start,
        counter_padding=options.counter_padding,
    )
    return SaveRequest(
        directory=options.folder_path,
        config=config,
        payload=payload,
        overwrite=options.overwrite,
        create_folders=options.create_folders,
    )


def save_items(
    items: list[Item],
    options: SaveOptions,
    *,
    continue_on_fail: bool = False,
    settings: Optional[Settings] = None,
    logger: logging.Logger | None = None,
) -> list[ItemResult]:
    """Save every item and report where each one was written.

    Args:
        items: Input items.
        options: Save options shared by all items.
        continue_on_fail: Record a per-item error and keep going instead of raising.
        settings: Settings providing attempt limits.
        logger: Optional logger for debug output.

    Returns:
        One result per item, in input order.
    """
    logger = logger or logging.getLogger(__name__)
    results: list[ItemResult] = []

    for index, item in enumerate(items):
        try:
            request = build_request(item, index, options)
            saved_path = save_request(request, settings=settings)
        except Exception as e:
            if not continue_on_fail:
                raise
            logger.warning(f"Item {index} failed: {e}")
            results.append(ItemResult(json={"error": str(e)}, paired_item=index))
            continue

        results.append(
            ItemResult(
                json={**item.json_data, SAVED_PATH_KEY: str(saved_path)},
                binary=item.binary,
                paired_item=index,
            )
        )

    return results
