"""
Decoder limits and CLI defaults.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# RLP limits
# ---------------------------------------------------------------------------

# Any declared string or list length at or above this is rejected before
# the payload is read.
MAX_RLP_LENGTH = 1_000_000

# Maximum list nesting. Many empty lists nested inside each other fit in a
# few bytes, so the length guard alone does not bound recursion.
MAX_RLP_DEPTH = 128

# Upper bound for a caller-supplied depth. Each nesting level costs two
# interpreter frames, so this stays well under the default recursion limit.
MAX_RLP_DEPTH_LIMIT = 256


# ---------------------------------------------------------------------------
# Transaction shape
# ---------------------------------------------------------------------------

ADDRESS_LENGTH = 20
LEGACY_TX_FIELDS = 9


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


@dataclass(frozen=True)
class DecoderConfig:
    max_length: int = MAX_RLP_LENGTH
    max_depth: int = MAX_RLP_DEPTH

    def __post_init__(self) -> None:
        if self.max_length <= 0:
            raise ValueError(f"max_length must be positive, got {self.max_length}")
        if not 0 <= self.max_depth <= MAX_RLP_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 0 and {MAX_RLP_DEPTH_LIMIT}, "
                f"got {self.max_depth}"
            )


DEFAULT_CONFIG = DecoderConfig()
