"""Hex codec shared by every byte-string field of the metadata document.

Rules:
- Encoding is lowercase hex with no prefix; empty bytes encode to "".
- Decoding accepts either case but nothing else: no whitespace, no "0x",
  no odd lengths.
"""

import binascii
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


class MalformedHexError(ValueError):
    """Raised when a document string is not valid hex."""
    pass


def encode_hex(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return binascii.hexlify(data).decode("ascii")


def decode_hex(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Args:
        text: Hex string, any case, even length

    Returns:
        Decoded bytes

    Raises:
        MalformedHexError: If the string has odd length or non-hex characters
    """
    if not isinstance(text, str):
        raise MalformedHexError(f"malformed hex: expected a string, got {type(text).__name__}")
    if len(text) % 2:
        raise MalformedHexError(f"malformed hex: odd length {len(text)}")
    try:
        return binascii.unhexlify(text)
    except ValueError as e:
        # binascii.Error and non-ASCII input both land here
        raise MalformedHexError(f"malformed hex: {text!r}") from e


def _coerce_hex(value: Any) -> Any:
    # bytes passed from Python are taken as-is; strings come from documents
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return decode_hex(value)


HexBytes = Annotated[
    bytes,
    BeforeValidator(_coerce_hex),
    PlainSerializer(encode_hex, return_type=str, when_used="json"),
]
