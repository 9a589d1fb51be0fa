"""sparsewire - sparse vector wire codec for vector-database clients."""

from sparsewire.core.exceptions import (
    CodecError,
    DimensionMismatchError,
    SparseFormatError,
    SparseValidationError,
)
from sparsewire.core.types import SparseVector, WireMessage, compute_dim
from sparsewire.codec import (
    SparseVectorCodec,
    decode_batch,
    decode_row,
    encode_batch,
    encode_row,
)

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "SparseFormatError",
    "SparseValidationError",
    "DimensionMismatchError",
    "SparseVector",
    "WireMessage",
    "compute_dim",
    "SparseVectorCodec",
    "encode_row",
    "decode_row",
    "encode_batch",
    "decode_batch",
]
