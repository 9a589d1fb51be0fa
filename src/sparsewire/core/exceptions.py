"""Exceptions raised by the sparse vector codec."""


class CodecError(Exception):
    """Base class for all codec errors."""
    pass


class SparseFormatError(CodecError):
    """Raised when a row buffer is not a whole number of 8-byte records."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Sparse vector bytes length must be multiple of 8, got {length}"
        )


class SparseValidationError(CodecError):
    """Raised by strict validation for NaN values or out-of-range indices."""
    pass


class DimensionMismatchError(CodecError):
    """Raised when a declared dim disagrees with the decoded rows."""

    def __init__(self, declared: int, actual: int):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"Declared dim {declared} does not match decoded rows (expected {actual})"
        )
