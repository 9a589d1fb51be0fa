"""Opt-in input checks for sparse rows. The plain codec does not run these."""

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from sparsewire.core.exceptions import DimensionMismatchError, SparseValidationError
from sparsewire.core.types import MAX_INDEX, SparseVector, compute_dim

logger = logging.getLogger(__name__)


def validate_row(row: Sequence[Tuple[int, float]]) -> None:
    """
    Check that every entry has an index in 0 .. 2**32 - 2 and a non-NaN value.

    Infinite values are accepted. Duplicate indices are accepted.

    Raises:
        SparseValidationError: On the first bad entry
    """
    for position, (index, value) in enumerate(row):
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise SparseValidationError(
                f"Entry {position}: index must be an integer, got {type(index).__name__}"
            )
        if index < 0 or index > MAX_INDEX:
            raise SparseValidationError(
                f"Entry {position}: index {index} out of range [0, {MAX_INDEX}]"
            )
        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            raise SparseValidationError(
                f"Entry {position}: value must be a number, got {type(value).__name__}"
            )
        if math.isnan(value):
            raise SparseValidationError(f"Entry {position}: value at index {index} is NaN")


def validate_batch(rows: Sequence[Sequence[Tuple[int, float]]]) -> None:
    """Run validate_row on every row, naming the row in the error."""
    for row_number, row in enumerate(rows):
        try:
            validate_row(row)
        except SparseValidationError as e:
            raise SparseValidationError(f"Row {row_number}: {e}") from e


def check_dim(rows: Sequence[SparseVector], dim: int) -> None:
    """
    Compare a declared dim with the one recomputed from rows.

    Raises:
        DimensionMismatchError: If they differ
    """
    actual = compute_dim(rows)
    if actual != dim:
        logger.debug(f"dim check failed: declared={dim}, recomputed={actual}")
        raise DimensionMismatchError(declared=dim, actual=actual)
