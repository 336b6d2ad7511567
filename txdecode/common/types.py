"""
Transaction types: Transaction, DecodedTransaction.

A legacy transaction is a flat RLP list whose first 9 entries are, in order,
nonce, gas price, gas limit, target, value, data, v, r, s.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Optional, Sequence, TypeVar

from txdecode.common import convert, rlp
from txdecode.common.config import LEGACY_TX_FIELDS
from txdecode.common.rlp import RLPDecodingError, RLPItem

T = TypeVar("T")


class InvalidTransactionError(RLPDecodingError):
    """The decoded RLP tree does not have the legacy transaction shape."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


def _field(
    items: Sequence[RLPItem],
    index: int,
    name: str,
    conv: Callable[[RLPItem], T],
) -> T:
    try:
        return conv(items[index])
    except RLPDecodingError as exc:
        raise InvalidTransactionError(
            f"Invalid transaction field {name!r} at position {index}: {exc}",
            field=name,
        ) from exc


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Transaction:
    nonce: int = 0
    gas: int = 0  # gas price
    gas_limit: int = 0
    target_address: str = "0x"
    value: int = 0
    data: str = "0x"

    # Signature
    v: str = "0x"
    r: str = "0x"
    s: str = "0x"

    @classmethod
    def from_rlp_list(cls, items: Sequence[RLPItem]) -> Transaction:
        """Build a transaction from a decoded RLP list.

        Entries past the ninth are ignored.
        """
        if len(items) < LEGACY_TX_FIELDS:
            raise InvalidTransactionError(
                f"Expected at least {LEGACY_TX_FIELDS} transaction fields, "
                f"got {len(items)}"
            )
        return cls(
            nonce=_field(items, 0, "nonce", convert.to_uint),
            gas=_field(items, 1, "gas", convert.to_uint),
            gas_limit=_field(items, 2, "gas_limit", convert.to_uint),
            target_address=_field(items, 3, "target_address", convert.to_hex),
            value=_field(items, 4, "value", convert.to_uint),
            data=_field(items, 5, "data", convert.to_hex),
            v=_field(items, 6, "v", convert.to_hex),
            r=_field(items, 7, "r", convert.to_hex),
            s=_field(items, 8, "s", convert.to_hex),
        )

    @classmethod
    def from_rlp(cls, item: RLPItem) -> Transaction:
        """Build a transaction from any decoded item, rejecting byte strings."""
        if not rlp.is_list(item):
            raise InvalidTransactionError("Expected RLP list, got bytes")
        return cls.from_rlp_list(item)

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Decode result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DecodedTransaction:
    """A transaction, optionally paired with a sender peeled off the input.

    sender is only set in estimate mode, where the 20-byte address precedes
    the RLP payload instead of being part of it.
    """
    transaction: Transaction
    sender: Optional[str] = None
    tx_hash: str = "0x"

    @property
    def is_estimate(self) -> bool:
        return self.sender is not None


def assemble(
    item: RLPItem,
    sender: Optional[str] = None,
    tx_hash: str = "0x",
) -> DecodedTransaction:
    """Turn a decoded RLP tree into a DecodedTransaction."""
    return DecodedTransaction(
        transaction=Transaction.from_rlp(item),
        sender=sender,
        tx_hash=tx_hash,
    )
