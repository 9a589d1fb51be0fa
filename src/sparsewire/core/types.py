"""Shared types used across modules."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

# A single row: (index, value) pairs. Indices are u32 in 0 .. 2**32 - 2,
# values are f32 and must not be NaN.
SparseVector = List[Tuple[int, float]]

# Size of one (u32 index, f32 value) record on the wire.
RECORD_SIZE = 8

MAX_INDEX = 2**32 - 2


@dataclass
class WireMessage:
    """
    Serialized batch of sparse vectors.

    Attributes:
        contents: One little-endian byte buffer per row, in input order
        dim: One plus the largest index in the batch (0 if no entries)
    """
    contents: List[bytes] = field(default_factory=list)
    dim: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to {"contents": [...], "dim": n} for an envelope builder."""
        return {"contents": list(self.contents), "dim": self.dim}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WireMessage":
        """Build from a dict holding ``contents`` and optionally ``dim``."""
        contents = [bytes(buf) for buf in data.get("contents", [])]
        return cls(contents=contents, dim=int(data.get("dim", 0)))

    def __len__(self) -> int:
        return len(self.contents)

    def __repr__(self) -> str:
        total = sum(len(buf) for buf in self.contents)
        return f"WireMessage(rows={len(self.contents)}, bytes={total}, dim={self.dim})"


def compute_dim(rows: Iterable[Sequence[Tuple[int, float]]]) -> int:
    """Return 1 + max index over all rows, or 0 when there are no entries."""
    dim = 0
    for row in rows:
        for index, _ in row:
            dim = max(dim, int(index) + 1)
    return dim


def from_dict(mapping: Mapping[int, float]) -> SparseVector:
    """Convert {index: value} to a row, keeping mapping order."""
    return [(int(index), float(value)) for index, value in mapping.items()]


def to_dict(row: Sequence[Tuple[int, float]]) -> Dict[int, float]:
    """Convert a row to {index: value}. Later duplicates overwrite earlier ones."""
    return {index: value for index, value in row}


def from_indices_values(indices: Sequence[int], values: Sequence[float]) -> SparseVector:
    """
    Zip parallel index/value lists into a row.

    Raises:
        ValueError: If the lists differ in length
    """
    if len(indices) != len(values):
        raise ValueError(
            f"indices and values must have the same length, "
            f"got {len(indices)} and {len(values)}"
        )
    return [(int(i), float(v)) for i, v in zip(indices, values)]


def to_indices_values(row: Sequence[Tuple[int, float]]) -> Tuple[List[int], List[float]]:
    """Split a row into parallel index and value lists."""
    indices = [index for index, _ in row]
    values = [value for _, value in row]
    return indices, values
