"""
Scalar conversions for decoded RLP items.

Only byte strings carry scalar values; passing a list raises
RLPDecodingError.
"""

from __future__ import annotations

from eth_utils import big_endian_to_int, encode_hex

from txdecode.common.rlp import RLPDecodingError, RLPItem


def to_bytes(item: RLPItem) -> bytes:
    """Return the raw payload of a byte-string item."""
    if not isinstance(item, bytes):
        raise RLPDecodingError("Expected RLP byte string, got list")
    return item


def to_hex(item: RLPItem) -> str:
    """Return the payload as lowercase hex with a 0x prefix (b'' -> '0x')."""
    return encode_hex(to_bytes(item))


def to_uint(item: RLPItem) -> int:
    """Decode the payload as a big-endian unsigned integer (b'' -> 0).

    Leading zeros are tolerated.
    """
    data = to_bytes(item)
    if len(data) == 0:
        return 0
    return big_endian_to_int(data)
