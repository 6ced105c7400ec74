import logging
import os
from typing import Iterable, List, Sequence, Tuple

from graphsynth.chunk import EDGES_FILE, NODES_FILE, Chunk
from graphsynth.exceptions import IncorrectParametersException, MergeRangeException

logger = logging.getLogger("graphsynth")


class OffsetTable:
    """Cumulative byte offsets of the chunks inside one destination file.

    :param offsets: the header length followed by the running end offset of
        every chunk, so chunk `i` owns [offsets[i], offsets[i + 1])

    """

    def __init__(self, offsets: List[int]):
        if not offsets:
            raise IncorrectParametersException("An offset table needs at least the header entry.")
        self._offsets = list(offsets)

    def __len__(self):
        """Returns the number of chunks in the table."""
        return len(self._offsets) - 1

    def __eq__(self, other):
        return isinstance(other, OffsetTable) and self._offsets == other._offsets

    def __repr__(self):
        return "OffsetTable({})".format(self._offsets)

    @property
    def offsets(self) -> List[int]:
        return list(self._offsets)

    @property
    def header_length(self) -> int:
        return self._offsets[0]

    @property
    def total(self) -> int:
        """Returns the final length of the destination file."""
        return self._offsets[-1]

    def range_of(self, index: int) -> Tuple[int, int]:
        """Returns the [start, end) byte range reserved for chunk `index`."""
        if not 0 <= index < len(self):
            raise IndexError("Chunk index {} out of range for {} chunks".format(index, len(self)))
        return self._offsets[index], self._offsets[index + 1]

    def ranges(self) -> List[Tuple[int, int]]:
        return [self.range_of(index) for index in range(len(self))]


def plan_offsets(header_length: int, lengths: Iterable[int]) -> OffsetTable:
    """Computes the prefix sum of chunk lengths starting after the header.

    This is the only place destination ranges are derived; an error here would
    silently overlap or gap the merged output, so inputs are checked."""
    if header_length < 0:
        raise IncorrectParametersException("Header length must not be negative, got {}.".format(header_length))

    offsets = [header_length]
    for index, length in enumerate(lengths):
        if length < 0:
            raise IncorrectParametersException("Chunk {} has negative length {}.".format(index, length))
        offsets.append(offsets[-1] + length)
    return OffsetTable(offsets)


def chunk_lengths(paths: Sequence[str]) -> List[int]:
    """Returns the byte size of every file, taken from `os.stat` without reading it."""
    return [os.stat(path).st_size for path in paths]


def reserve(path: str, size: int) -> None:
    """Pre-extends `path` to `size` bytes so every reserved range is valid file space."""
    current = os.stat(path).st_size
    if size < current:
        raise MergeRangeException("Refusing to shrink {} from {} to {} bytes.".format(path, current, size))
    os.truncate(path, size)


def plan_merge(chunks: Sequence[Chunk], outdir: str) -> Tuple[OffsetTable, OffsetTable]:
    """Plans and reserves both destination files before any merger starts.

    The header length of each destination is its current size, so the
    headers must already be written."""
    node_path = os.path.join(outdir, NODES_FILE)
    edge_path = os.path.join(outdir, EDGES_FILE)

    node_table = plan_offsets(
        os.stat(node_path).st_size, chunk_lengths([chunk.nodes_path(outdir) for chunk in chunks])
    )
    edge_table = plan_offsets(
        os.stat(edge_path).st_size, chunk_lengths([chunk.edges_path(outdir) for chunk in chunks])
    )

    reserve(node_path, node_table.total)
    reserve(edge_path, edge_table.total)
    logger.debug("Reserved %d node bytes and %d edge bytes", node_table.total, edge_table.total)
    return node_table, edge_table
