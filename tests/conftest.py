"""Pytest configuration and shared fixtures for all tests."""

import pytest
import rlp as pyrlp


# =============================================================================
# Transaction Fixtures
# =============================================================================

# EIP-155 example: nonce 9, 20 Gwei, 21000 gas, 1 ether to 0x3535...35, chain id 1
EIP155_TX_HEX = (
    "0xf86c098504a817c800825208943535353535353535353535353535353535353535"
    "880de0b6b3a76400008025a028ef61340bd939bc2195fe537567866003e1a15d3c71"
    "ff63e1590620aa636276a067cbe9d8997f761aecb703304b3800ccf555c9f3dc6421"
    "4b297fb1966a3b6d83"
)

SENDER_BYTES = bytes(range(1, 21))


@pytest.fixture
def legacy_tx_fields():
    """Nine legacy fields: nonce=1, gas price=1, gas limit=21000, zero target."""
    return [1, 1, 21_000, b"\x00" * 20, 0, b"", b"\x1b", b"\x01", b"\x02"]


@pytest.fixture
def legacy_tx_bytes(legacy_tx_fields):
    """RLP encoding of legacy_tx_fields."""
    return pyrlp.encode(legacy_tx_fields)


@pytest.fixture
def legacy_tx_hex(legacy_tx_bytes):
    return "0x" + legacy_tx_bytes.hex()


@pytest.fixture
def eip155_tx_hex():
    return EIP155_TX_HEX


@pytest.fixture
def eip155_tx_bytes():
    return bytes.fromhex(EIP155_TX_HEX[2:])


@pytest.fixture
def sender_bytes():
    """Arbitrary 20-byte sender address prepended in estimate mode."""
    return SENDER_BYTES


# =============================================================================
# RLP Helpers
# =============================================================================

def _list_prefix(length: int) -> bytes:
    if length <= 54:
        return bytes([0xc0 + length])
    len_bytes = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0xf7 + len(len_bytes)]) + len_bytes


@pytest.fixture
def nested_lists():
    """Factory: encoding of `depth` empty lists nested inside each other."""
    def _nested(depth: int) -> bytes:
        encoded = b"\xc0"
        for _ in range(depth - 1):
            encoded = _list_prefix(len(encoded)) + encoded
        return encoded
    return _nested
