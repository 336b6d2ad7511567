"""
RLP (Recursive Length Prefix) decoding.

Implements decoding of the Ethereum RLP serialization format as specified in:
https://ethereum.org/en/developers/docs/data-structures-and-encoding/rlp/

RLP encodes two types of items:
- Byte strings (bytes)
- Lists of items (which can contain byte strings or nested lists)

Decoded lists are returned as tuples so the whole tree is immutable.

The prefix ranges follow the anchors 0x80, 0xb7, 0xc0 and 0xf7 exactly:

    0x00-0x7e   single byte, encoded as itself
    0x7f-0xb6   short string, length = prefix - 0x80
    0xb7-0xbe   long string, prefix - 0xb7 = length of length
    0xbf-0xf6   short list, payload length = prefix - 0xc0
    0xf7-0xff   long list, prefix - 0xf7 = length of length

Non-canonical encodings are accepted. Prefixes 0x7f and 0xbf yield a
negative length and are rejected.
"""

from __future__ import annotations

from typing import Union

from txdecode.common.config import (
    MAX_RLP_DEPTH,
    MAX_RLP_DEPTH_LIMIT,
    MAX_RLP_LENGTH,
)

# RLP item: either raw bytes or a tuple of RLP items
RLPItem = Union[bytes, tuple["RLPItem", ...]]


class RLPDecodingError(Exception):
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def decode_item(
    data: bytes | bytearray | memoryview,
    offset: int = 0,
    *,
    max_length: int = MAX_RLP_LENGTH,
    max_depth: int = MAX_RLP_DEPTH,
) -> tuple[RLPItem, int]:
    """Decode one RLP item starting at offset.

    Returns (item, new_offset). Bytes after the item are left untouched so
    the caller can keep reading from new_offset. max_depth is capped at
    MAX_RLP_DEPTH_LIMIT.
    """
    if not 0 <= max_depth <= MAX_RLP_DEPTH_LIMIT:
        raise ValueError(
            f"max_depth must be between 0 and {MAX_RLP_DEPTH_LIMIT}, got {max_depth}"
        )
    view = memoryview(bytes(data))
    return _decode_item(view, offset, len(view), max_length, max_depth, 0)


def decode(
    data: bytes | bytearray | memoryview,
    strict: bool = True,
    *,
    max_length: int = MAX_RLP_LENGTH,
    max_depth: int = MAX_RLP_DEPTH,
) -> RLPItem:
    """Decode RLP bytes into bytes or a nested tuple of bytes.

    If strict=False, trailing bytes after the first RLP item are ignored.
    """
    item, consumed = decode_item(
        data, 0, max_length=max_length, max_depth=max_depth
    )
    if strict and consumed != len(data):
        raise RLPDecodingError(
            f"Trailing bytes: consumed {consumed} of {len(data)}"
        )
    return item


def decode_list(
    data: bytes | bytearray | memoryview,
    strict: bool = True,
    *,
    max_length: int = MAX_RLP_LENGTH,
    max_depth: int = MAX_RLP_DEPTH,
) -> tuple[RLPItem, ...]:
    """Decode RLP bytes, asserting the top-level item is a list."""
    result = decode(data, strict, max_length=max_length, max_depth=max_depth)
    if not isinstance(result, tuple):
        raise RLPDecodingError("Expected RLP list, got bytes")
    return result


def is_list(item: RLPItem) -> bool:
    return isinstance(item, tuple)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _decode_item(
    data: memoryview,
    offset: int,
    end: int,
    max_length: int,
    max_depth: int,
    depth: int,
) -> tuple[RLPItem, int]:
    """Decode one item from data[offset:end], return (item, new_offset)."""
    if offset >= end:
        raise RLPDecodingError("Unexpected end of data")

    prefix = data[offset]
    offset += 1

    if prefix <= 0x7e:
        # Single byte
        return bytes([prefix]), offset

    if prefix <= 0xb6:
        # Short string
        return _read_string(data, offset, end, prefix - 0x80, max_length)

    if prefix <= 0xbe:
        # Long string
        str_len, offset = _read_length(data, offset, end, prefix - 0xb7)
        return _read_string(data, offset, end, str_len, max_length)

    if prefix <= 0xf6:
        # Short list
        return _read_list(
            data, offset, end, prefix - 0xc0, max_length, max_depth, depth
        )

    # Long list
    list_len, offset = _read_length(data, offset, end, prefix - 0xf7)
    return _read_list(data, offset, end, list_len, max_length, max_depth, depth)


def _check_length(length: int, max_length: int) -> None:
    if length < 0:
        raise RLPDecodingError(f"Invalid length prefix (length {length})")
    if length >= max_length:
        raise RLPDecodingError(
            f"Declared length {length} exceeds limit of {max_length}"
        )


def _read_length(
    data: memoryview, offset: int, end: int, len_of_len: int
) -> tuple[int, int]:
    """Read a big-endian length field of len_of_len bytes."""
    len_end = offset + len_of_len
    if len_end > end:
        raise RLPDecodingError("Length-of-length exceeds data")
    return int.from_bytes(data[offset:len_end], "big"), len_end


def _read_string(
    data: memoryview, offset: int, end: int, length: int, max_length: int
) -> tuple[bytes, int]:
    _check_length(length, max_length)
    str_end = offset + length
    if str_end > end:
        raise RLPDecodingError(
            f"String length {length} exceeds remaining {end - offset} bytes"
        )
    return bytes(data[offset:str_end]), str_end


def _read_list(
    data: memoryview,
    offset: int,
    end: int,
    length: int,
    max_length: int,
    max_depth: int,
    depth: int,
) -> tuple[tuple[RLPItem, ...], int]:
    _check_length(length, max_length)
    if depth >= max_depth:
        raise RLPDecodingError(f"List nesting exceeds depth {max_depth}")
    list_end = offset + length
    if list_end > end:
        raise RLPDecodingError(
            f"List length {length} exceeds remaining {end - offset} bytes"
        )

    # Items are bounded by the list payload, so an item running past it fails
    items: list[RLPItem] = []
    pos = offset
    while pos < list_end:
        item, pos = _decode_item(
            data, pos, list_end, max_length, max_depth, depth + 1
        )
        items.append(item)
    return tuple(items), list_end
