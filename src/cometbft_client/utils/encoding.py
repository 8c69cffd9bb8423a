"""Wire-value helpers — base64, hex and stringified integers.

CometBFT's JSON encoder writes ``int64``/``uint64`` values as strings,
``[]byte`` fields as standard base64 and ``HexBytes`` fields as upper-case hex.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a JSON number or stringified integer, returning *default* for null/empty."""
    if value is None or value == "":
        return default
    return int(value)


def decode_base64(value: str | None) -> bytes:
    """Strictly decode standard, padded base64.

    Carriage returns and newlines are ignored, as Go's decoder does.

    Raises:
        binascii.Error: If *value* contains characters outside the standard
            alphabet or has incorrect padding.
    """
    if not value:
        return b""
    value = value.replace("\r", "").replace("\n", "")
    return base64.b64decode(value, validate=True)


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_hex(value: str | None) -> bytes:
    """Decode a hex string (either case, optional ``0x`` prefix)."""
    if not value:
        return b""
    if value.startswith(("0x", "0X")):
        value = value[2:]
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        msg = f"invalid hex string: {value!r}"
        raise binascii.Error(msg) from exc


def encode_hex(data: bytes) -> str:
    """Encode bytes as upper-case hex, matching CometBFT ``HexBytes``."""
    return data.hex().upper()
