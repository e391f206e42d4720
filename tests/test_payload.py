from __future__ import annotations

import base64
import json

from savefile.payload import BinaryData, binary_to_bytes, resolve_binary_naming, text_to_bytes


def test_binary_to_bytes_decodes_base64() -> None:
    binary = BinaryData(data=base64.b64encode(b"\x00\x01hello").decode())
    assert binary_to_bytes(binary) == b"\x00\x01hello"


def test_binary_data_accepts_aliases() -> None:
    binary = BinaryData.model_validate({"data": "", "fileName": "scan.pdf", "mimeType": "application/pdf"})
    assert binary.file_name == "scan.pdf"
    assert binary.mime_type == "application/pdf"


def test_text_to_bytes() -> None:
    assert text_to_bytes("héllo") == ("héllo".encode("utf-8"), "txt")

    payload, extension = text_to_bytes({"a": 1})
    assert extension == "json"
    assert payload.decode("utf-8") == json.dumps({"a": 1}, indent=2)


def test_resolve_binary_naming() -> None:
    assert resolve_binary_naming("invoice.final.pdf", "", "") == ("invoice.final", "pdf")
    assert resolve_binary_naming("README", "", "") == ("README", "")
    assert resolve_binary_naming(None, "", "") == ("file", "bin")
    assert resolve_binary_naming("scan.pdf", "custom", "dat") == ("custom", "dat")
