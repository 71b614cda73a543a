from __future__ import annotations

import base64
import binascii
from typing import Optional

MAX_UPLOAD_BYTES = 10_000_000


def decode_text_upload(contents: Optional[str]) -> str:
    """
    Decode a dcc.Upload payload ("data:<mime>;base64,<data>") into text.

    Raises ValueError when the payload is malformed, too large or not UTF-8.
    """
    if not contents:
        raise ValueError("Empty upload.")

    try:
        _header, b64data = contents.split(",", 1)
    except ValueError:
        raise ValueError("Upload payload is malformed.") from None

    try:
        raw_bytes = base64.b64decode(b64data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Upload payload is not valid base64 ({e}).") from e

    if len(raw_bytes) > MAX_UPLOAD_BYTES:
        raise ValueError(f"File is too large ({len(raw_bytes)} bytes, max {MAX_UPLOAD_BYTES}).")

    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        raise ValueError("File is not UTF-8 text.") from None
