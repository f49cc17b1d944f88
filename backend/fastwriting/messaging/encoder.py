"""
MessagePack codec for the WebSocket wire format.

Every frame is a single MessagePack map with string keys. Decoding enforces
small size limits: clients only ever send short commands and typed text.
"""

from typing import Any

import msgpack

MAX_BUFFER_LEN = 16 * 1024
MAX_STR_LEN = 4 * 1024  # longest phrase is a few hundred characters
MAX_BIN_LEN = 1024
MAX_ARRAY_LEN = 64
MAX_MAP_LEN = 32
MAX_EXT_LEN = 0  # extension types are never valid input


class DecodeError(Exception):
    """Error raised when an incoming frame is not a valid message map."""


def encode(data: dict[str, Any]) -> bytes:
    """Encode a message map to MessagePack bytes."""
    return msgpack.packb(data, use_bin_type=True)


def decode(data: bytes) -> dict[str, Any]:
    """
    Decode MessagePack bytes to a message map.

    Raises DecodeError if data is oversized, malformed, or not a map.
    """
    if len(data) > MAX_BUFFER_LEN:
        raise DecodeError(f"payload too large: {len(data)} bytes (max {MAX_BUFFER_LEN})")
    try:
        result = msgpack.unpackb(
            data,
            raw=False,
            strict_map_key=True,
            max_str_len=MAX_STR_LEN,
            max_bin_len=MAX_BIN_LEN,
            max_array_len=MAX_ARRAY_LEN,
            max_map_len=MAX_MAP_LEN,
            max_ext_len=MAX_EXT_LEN,
        )
    except (msgpack.UnpackException, ValueError) as e:
        raise DecodeError(f"failed to decode MessagePack data: {e}") from e

    if not isinstance(result, dict):
        raise DecodeError(f"expected map, got {type(result).__name__}")
    return result
