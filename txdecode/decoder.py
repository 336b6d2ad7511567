"""
Transaction decoding pipeline.

    text -> resolve_input -> raw bytes
         -> (estimate mode) split_sender
         -> rlp.decode_item -> RLP tree
         -> types.assemble -> DecodedTransaction
"""

from __future__ import annotations

import logging
from typing import Optional

from eth_utils import encode_hex

from txdecode.common import rlp
from txdecode.common.config import DEFAULT_CONFIG, DecoderConfig
from txdecode.common.crypto import keccak256
from txdecode.common.encoding import resolve_input, split_sender
from txdecode.common.types import DecodedTransaction, assemble

logger = logging.getLogger(__name__)


def parse_raw_transaction(
    data: bytes,
    estimate: bool = False,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> DecodedTransaction:
    """Decode raw transaction bytes.

    In estimate mode the first 20 bytes are the sender address and the RLP
    list starts right after them. Bytes following the RLP list are ignored.
    """
    sender: Optional[str] = None
    if estimate:
        sender, data = split_sender(data)

    item, consumed = rlp.decode_item(
        data, 0, max_length=config.max_length, max_depth=config.max_depth
    )
    if consumed != len(data):
        logger.debug("Ignoring %d trailing bytes", len(data) - consumed)

    tx_hash = encode_hex(keccak256(data[:consumed]))
    return assemble(item, sender=sender, tx_hash=tx_hash)


def decode_transaction(
    text: str,
    estimate: bool = False,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> DecodedTransaction:
    """Decode hex or base64 transaction text."""
    return parse_raw_transaction(resolve_input(text), estimate, config)
