"""Legacy Ethereum transaction decoder."""

from txdecode.common.encoding import TransactionFormatError
from txdecode.common.rlp import RLPDecodingError
from txdecode.common.types import (
    DecodedTransaction,
    InvalidTransactionError,
    Transaction,
)
from txdecode.decoder import decode_transaction, parse_raw_transaction

__all__ = [
    "DecodedTransaction",
    "InvalidTransactionError",
    "RLPDecodingError",
    "Transaction",
    "TransactionFormatError",
    "decode_transaction",
    "parse_raw_transaction",
]
