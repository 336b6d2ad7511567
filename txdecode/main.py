"""
py-txdecode: decode a raw legacy Ethereum transaction.

Entry point for the command line:
  1. Parse CLI arguments
  2. Read the transaction from the argument or standard input
  3. Decode hex/base64 text into a DecodedTransaction
  4. Print the result as JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from txdecode.common.config import (
    DEFAULT_LOG_LEVEL,
    LOG_DATEFMT,
    LOG_FORMAT,
    MAX_RLP_DEPTH,
    MAX_RLP_DEPTH_LIMIT,
    DecoderConfig,
)
from txdecode.common.encoding import TransactionFormatError
from txdecode.common.rlp import RLPDecodingError
from txdecode.common.types import DecodedTransaction
from txdecode.decoder import decode_transaction


logger = logging.getLogger("txdecode")


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def format_result(result: DecodedTransaction, show_hash: bool = False) -> str:
    body = json.dumps(result.transaction.to_dict(), indent=2)
    if result.is_estimate:
        text = f"Sender: {result.sender},\ntransaction: {body}"
    else:
        text = body
    if show_hash:
        text += f"\nHash: {result.tx_hash}"
    return text


def read_stdin_tx() -> str:
    return sys.stdin.read()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-txdecode",
        description="Decode a raw legacy Ethereum transaction (hex or base64)",
    )
    parser.add_argument(
        "transaction",
        nargs="?",
        default="",
        help="Hex or base64 encoded transaction (read from stdin if omitted)",
    )
    parser.add_argument(
        "-e", "--estimate",
        action="store_true",
        help="Input starts with a 20-byte sender address",
    )
    parser.add_argument(
        "--hash",
        action="store_true",
        help="Also print the keccak256 hash of the transaction",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_RLP_DEPTH,
        help=(
            f"Maximum RLP list nesting, 0-{MAX_RLP_DEPTH_LIMIT} "
            f"(default: {MAX_RLP_DEPTH})"
        ),
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    if not 0 <= args.max_depth <= MAX_RLP_DEPTH_LIMIT:
        parser.error(f"--max-depth must be between 0 and {MAX_RLP_DEPTH_LIMIT}")
    config = DecoderConfig(max_depth=args.max_depth)

    transaction = args.transaction
    if not transaction:
        try:
            transaction = read_stdin_tx()
        except OSError as exc:
            print(f"Unable to read transaction: {exc}", file=sys.stderr)
            sys.exit(1)
        logger.debug("Read %d characters from stdin", len(transaction))

    try:
        result = decode_transaction(transaction, args.estimate, config)
    except (TransactionFormatError, RLPDecodingError) as exc:
        logger.debug("Decoding failed", exc_info=True)
        print(f"Unable to decode transaction: {exc}", file=sys.stderr)
        sys.exit(1)

    print(format_result(result, show_hash=args.hash))


if __name__ == "__main__":
    main()
