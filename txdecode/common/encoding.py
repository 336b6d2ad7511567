"""
Input resolution: transaction text (hex or base64) to raw bytes.

Hex is tried first, then standard base64. Exactly one of the two is used;
text matching neither is rejected.
"""

from __future__ import annotations

import base64
import logging
import re

from eth_utils import encode_hex

from txdecode.common.config import ADDRESS_LENGTH
from txdecode.common.rlp import RLPDecodingError

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^(0x)?([0-9A-Fa-f]{2})+$")
BASE64_PATTERN = re.compile(
    r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$"
)


class TransactionFormatError(ValueError):
    """Transaction text is neither hex nor base64."""


def is_hex(text: str) -> bool:
    return HEX_PATTERN.match(text) is not None


def is_base64(text: str) -> bool:
    return BASE64_PATTERN.match(text) is not None


def resolve_input(text: str) -> bytes:
    """Decode trimmed transaction text into raw bytes."""
    text = text.strip()
    if is_hex(text):
        raw = bytes.fromhex(text.removeprefix("0x"))
        logger.debug("Decoded %d bytes from hex input", len(raw))
        return raw
    if is_base64(text):
        raw = base64.b64decode(text, validate=True)
        logger.debug("Decoded %d bytes from base64 input", len(raw))
        return raw
    raise TransactionFormatError("Invalid transaction format")


def split_sender(data: bytes) -> tuple[str, bytes]:
    """Peel the leading sender address off an estimate-mode payload.

    Returns ("0x" + hex address, remaining bytes).
    """
    if len(data) < ADDRESS_LENGTH:
        raise RLPDecodingError(
            f"Expected {ADDRESS_LENGTH}-byte sender address, got {len(data)} bytes"
        )
    address = encode_hex(data[:ADDRESS_LENGTH])
    logger.debug("Peeled sender address %s", address)
    return address, data[ADDRESS_LENGTH:]
