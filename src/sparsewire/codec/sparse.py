"""
Sparse vector row codec.

Row format (little-endian), repeated once per entry in ascending index order:
    - index: 4 bytes, uint32
    - value: 4 bytes, float32

A batch is carried as a WireMessage: one buffer per row plus ``dim``,
the largest index in the batch plus one.
"""

import logging
from operator import itemgetter
from typing import List, Sequence, Union

import numpy as np

from sparsewire.core.exceptions import SparseFormatError
from sparsewire.core.types import RECORD_SIZE, SparseVector, WireMessage

logger = logging.getLogger(__name__)

RECORD_DTYPE = np.dtype([("index", "<u4"), ("value", "<f4")])

BytesLike = Union[bytes, bytearray, memoryview]


def encode_row(row: SparseVector) -> bytes:
    """
    Convert a single sparse vector row to bytes.

    The row is sorted in place by index. The sort is stable, so entries
    sharing an index keep their relative order.

    Args:
        row: (index, value) pairs

    Returns:
        8 bytes per entry, empty for an empty row
    """
    row.sort(key=itemgetter(0))

    records = np.empty(len(row), dtype=RECORD_DTYPE)
    if row:
        records["index"] = [index for index, _ in row]
        records["value"] = [value for _, value in row]
    return records.tobytes()


def decode_row(data: BytesLike) -> SparseVector:
    """
    Deserialize a single sparse vector row from bytes.

    Record order is kept as-is; sortedness is not re-checked.

    Raises:
        SparseFormatError: If the length is not a multiple of 8
    """
    # count bytes, not items, for memoryviews over wider types
    data = memoryview(data).cast("B")
    if data.nbytes % RECORD_SIZE != 0:
        raise SparseFormatError(data.nbytes)

    records = np.frombuffer(data, dtype=RECORD_DTYPE)
    return list(zip(records["index"].tolist(), records["value"].tolist()))


def encode_batch(rows: Sequence[SparseVector]) -> WireMessage:
    """
    Serialize multiple sparse vectors.

    Every row is sorted in place as a side effect.

    Args:
        rows: Sparse vectors, possibly empty

    Returns:
        WireMessage with one buffer per row and dim = max index + 1
    """
    contents: List[bytes] = []
    dim = 0

    for row in rows:
        contents.append(encode_row(row))
        # sorted, so the last entry carries the largest index
        if row:
            dim = max(dim, int(row[-1][0]) + 1)

    logger.debug(f"Encoded {len(contents)} sparse rows, dim={dim}")
    return WireMessage(contents=contents, dim=dim)


def decode_batch(message: WireMessage) -> List[SparseVector]:
    """
    Deserialize every row of a WireMessage, in order.

    ``dim`` is not checked against the decoded rows.

    Raises:
        SparseFormatError: For the first malformed row; nothing is returned
    """
    rows = [decode_row(buf) for buf in message.contents]
    logger.debug(f"Decoded {len(rows)} sparse rows")
    return rows
