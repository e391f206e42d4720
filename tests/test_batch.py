from __future__ import annotations

import base64
import json

import pytest

from savefile.batch import Item, SaveOptions, save_items
from savefile.errors import MissingBinaryPropertyError


def binary_item(content: bytes, file_name: str | None = None, **json_fields) -> Item:
    binary = {"data": base64.b64encode(content).decode()}
    if file_name:
        binary["fileName"] = file_name
    return Item.model_validate({"json": json_fields, "binary": {"data": binary}})


def test_binary_items_use_original_file_name(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path / "out", base_name="")
    items = [binary_item(b"a", "photo.jpg", id=1), binary_item(b"b", "photo.jpg", id=2)]

    results = save_items(items, options)

    assert [r.saved_path for r in results] == [
        str(tmp_path / "out" / "photo_001.jpg"),
        str(tmp_path / "out" / "photo_002.jpg"),
    ]
    assert results[0].json_data["id"] == 1
    assert results[1].paired_item == 1
    assert "data" in results[0].binary
    assert (tmp_path / "out" / "photo_002.jpg").read_bytes() == b"b"


def test_binary_item_without_file_name_defaults_to_bin(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path)
    results = save_items([binary_item(b"raw")], options)
    assert results[0].saved_path == str(tmp_path / "file_001.bin")


def test_base_name_is_sanitized(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path, base_name="q1/q2: report", extension="csv")
    results = save_items([binary_item(b"x")], options)
    assert results[0].saved_path == str(tmp_path / "q1-q2- report_001.csv")


def test_text_mode_string_and_json(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path, input_mode="text", data_field="body", base_name="note")
    items = [
        Item.model_validate({"json": {"body": "hello"}}),
        Item.model_validate({"json": {"body": {"k": [1, 2]}}}),
    ]

    results = save_items(items, options)

    assert results[0].saved_path == str(tmp_path / "note_001.txt")
    assert results[1].saved_path == str(tmp_path / "note_001.json")
    assert (tmp_path / "note_001.txt").read_text(encoding="utf-8") == "hello"
    assert json.loads((tmp_path / "note_001.json").read_text(encoding="utf-8")) == {"k": [1, 2]}


def test_missing_binary_property_raises(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path, binary_property="attachment")

    with pytest.raises(MissingBinaryPropertyError) as exc_info:
        save_items([binary_item(b"x")], options)
    assert "attachment" in str(exc_info.value)
    assert exc_info.value.index == 0


def test_continue_on_fail_records_error_and_keeps_going(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path, extension="bin")
    items = [Item.model_validate({"json": {"id": 1}}), binary_item(b"ok")]

    results = save_items(items, options, continue_on_fail=True)

    assert results[0].error == "No binary property 'data' found on item 0."
    assert results[0].saved_path is None
    assert results[1].saved_path == str(tmp_path / "file_001.bin")


def test_overwrite_option(tmp_path) -> None:
    options = SaveOptions(folder_path=tmp_path, base_name="same", extension="txt", overwrite=True)
    save_items([binary_item(b"one"), binary_item(b"two")], options)

    assert [p.name for p in tmp_path.iterdir()] == ["same_001.txt"]
    assert (tmp_path / "same_001.txt").read_bytes() == b"two"
