"""Hex encoding/decoding utilities for keysmith."""

import re

# Lowercase or uppercase hex digits, even length
HEX_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})*")


class HexDecodeError(ValueError):
    """Raised when a string is not valid hex."""

    pass


def to_hex(data: bytes) -> str:
    """Encode bytes to lowercase hex without separators.

    Args:
        data: The bytes to encode.

    Returns:
        Lowercase hex string.
    """
    return bytes(data).hex()


def from_hex(s: str) -> bytes:
    """Decode a hex string to bytes.

    Unlike ``bytes.fromhex``, whitespace is not accepted.

    Args:
        s: The hex string to decode.

    Returns:
        The decoded bytes.

    Raises:
        HexDecodeError: If the string has odd length or non-hex characters.
    """
    if len(s) % 2:
        raise HexDecodeError(f"Invalid hex: odd length {len(s)}")
    if not HEX_PATTERN.fullmatch(s):
        raise HexDecodeError("Invalid hex: contains non-hex characters")
    return bytes.fromhex(s)
