"""Tests for opt-in sparse row validation."""

import numpy as np
import pytest

from sparsewire.codec.validation import check_dim, validate_batch, validate_row
from sparsewire.core.exceptions import (
    CodecError,
    DimensionMismatchError,
    SparseValidationError,
)


class TestValidateRow:
    """Tests for validate_row."""

    def test_valid_row(self):
        """Well-formed row should pass."""
        validate_row([(0, 0.5), (2**32 - 2, -1.0), (3, float("inf"))])

    def test_empty_row(self):
        """Empty row should pass."""
        validate_row([])

    def test_duplicates_allowed(self):
        """Duplicate indices are not a validation error."""
        validate_row([(4, 1.0), (4, 2.0)])

    def test_numpy_integer_index(self):
        """numpy integer indices should be accepted."""
        validate_row([(np.uint32(7), 1.0)])

    def test_nan_value(self):
        """NaN value should be rejected."""
        with pytest.raises(SparseValidationError) as exc_info:
            validate_row([(1, 1.0), (9, float("nan"))])

        assert "NaN" in str(exc_info.value)
        assert "Entry 1" in str(exc_info.value)

    def test_reserved_index(self):
        """Index 2**32 - 1 is reserved and should be rejected."""
        with pytest.raises(SparseValidationError) as exc_info:
            validate_row([(2**32 - 1, 1.0)])

        assert "out of range" in str(exc_info.value)

    def test_negative_index(self):
        """Negative index should be rejected."""
        with pytest.raises(SparseValidationError):
            validate_row([(-1, 1.0)])

    @pytest.mark.parametrize("index", [1.0, "3", True])
    def test_non_integer_index(self, index):
        """Non-integer index should be rejected."""
        with pytest.raises(SparseValidationError) as exc_info:
            validate_row([(index, 1.0)])

        assert "must be an integer" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["0.5", None, True])
    def test_non_numeric_value(self, value):
        """Non-numeric value should be rejected, not crash."""
        with pytest.raises(SparseValidationError) as exc_info:
            validate_row([(1, value)])

        assert "must be a number" in str(exc_info.value)

    def test_numpy_float_value(self):
        """numpy float values should be accepted."""
        validate_row([(1, np.float32(0.5))])


class TestValidateBatch:
    """Tests for validate_batch."""

    def test_names_failing_row(self):
        """Error should name the offending row."""
        # Arrange
        rows = [[(1, 1.0)], [], [(2, float("nan"))]]

        # Act & Assert
        with pytest.raises(SparseValidationError) as exc_info:
            validate_batch(rows)

        assert str(exc_info.value).startswith("Row 2:")

    def test_valid_batch(self):
        """Valid batch should pass."""
        validate_batch([[(1, 1.0)], []])


class TestCheckDim:
    """Tests for check_dim."""

    def test_matching_dim(self):
        """Matching dim should pass."""
        check_dim([[(5, 0.5)], [(20, 2.0)]], 21)

    def test_empty_rows_dim_zero(self):
        """No entries means dim 0."""
        check_dim([[], []], 0)

    def test_mismatch(self):
        """Mismatch should raise DimensionMismatchError with both values."""
        # Act & Assert
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_dim([[(5, 0.5)]], 100)

        assert exc_info.value.declared == 100
        assert exc_info.value.actual == 6
        assert isinstance(exc_info.value, CodecError)
