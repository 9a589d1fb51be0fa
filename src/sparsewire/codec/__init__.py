"""Codec module - sparse vector <-> wire message conversion."""

from sparsewire.codec.sparse import (
    RECORD_DTYPE,
    decode_batch,
    decode_row,
    encode_batch,
    encode_row,
)
from sparsewire.codec.validation import check_dim, validate_batch, validate_row
from sparsewire.codec.codec import SparseVectorCodec

__all__ = [
    "RECORD_DTYPE",
    "encode_row",
    "decode_row",
    "encode_batch",
    "decode_batch",
    "validate_row",
    "validate_batch",
    "check_dim",
    "SparseVectorCodec",
]
