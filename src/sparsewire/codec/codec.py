"""Configurable front end for the sparse vector codec."""

import logging
from typing import Any, Dict, List, Sequence

from sparsewire.codec import sparse
from sparsewire.codec.validation import check_dim, validate_batch, validate_row
from sparsewire.core.config import Config
from sparsewire.core.types import SparseVector, WireMessage

logger = logging.getLogger(__name__)


class SparseVectorCodec:
    """
    Sparse vector codec with optional input checks.

    With the defaults it behaves exactly like the functions in
    ``sparsewire.codec.sparse``.

    Usage:
        codec = SparseVectorCodec(strict=True)
        message = codec.encode_batch([[(5, 0.5), (3, 0.25)]])
        rows = codec.decode_batch(message)

        # Or from the "codec" section of a loaded Config
        codec = SparseVectorCodec.from_settings(Config.load())

    Attributes:
        strict: Reject NaN values and out-of-range indices before encoding
        verify_dim: Recompute dim after decoding and compare
        copy_rows: Sort copies instead of the caller's rows
    """

    OPTIONS = ("strict", "verify_dim", "copy_rows")

    def __init__(
        self,
        strict: bool = False,
        verify_dim: bool = False,
        copy_rows: bool = False,
    ):
        self.strict = strict
        self.verify_dim = verify_dim
        self.copy_rows = copy_rows

        logger.info(
            f"Initialized SparseVectorCodec: strict={strict}, "
            f"verify_dim={verify_dim}, copy_rows={copy_rows}"
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SparseVectorCodec":
        """
        Create codec from config dict.

        Args:
            config: Dict with any of strict, verify_dim, copy_rows

        Raises:
            ValueError: If config has unknown keys or non-bool values
        """
        unknown = sorted(set(config) - set(cls.OPTIONS))
        if unknown:
            raise ValueError(
                f"Unknown codec options: {unknown}. "
                f"Available: {list(cls.OPTIONS)}"
            )
        for key, value in config.items():
            if not isinstance(value, bool):
                raise ValueError(
                    f"Codec option '{key}' must be true or false, got {value!r}"
                )
        return cls(**config)

    @classmethod
    def from_settings(cls, config: Config) -> "SparseVectorCodec":
        """Create codec from the ``codec`` section of a loaded Config."""
        return cls.from_config(config.get_section("codec") or {})

    def encode_row(self, row: SparseVector) -> bytes:
        if self.strict:
            validate_row(row)
        if self.copy_rows:
            row = list(row)
        return sparse.encode_row(row)

    def encode_batch(self, rows: Sequence[SparseVector]) -> WireMessage:
        if self.strict:
            validate_batch(rows)
        if self.copy_rows:
            rows = [list(row) for row in rows]
        return sparse.encode_batch(rows)

    def decode_row(self, data: bytes) -> SparseVector:
        return sparse.decode_row(data)

    def decode_batch(self, message: WireMessage) -> List[SparseVector]:
        rows = sparse.decode_batch(message)
        if self.verify_dim:
            check_dim(rows, message.dim)
        return rows

    def __repr__(self) -> str:
        return (
            f"SparseVectorCodec(strict={self.strict}, "
            f"verify_dim={self.verify_dim}, copy_rows={self.copy_rows})"
        )
