import logging
import os
from dataclasses import dataclass
from typing import Tuple

from graphsynth.chunk import EDGES_FILE, NODES_FILE, Chunk
from graphsynth.exceptions import MergeRangeException

logger = logging.getLogger("graphsynth")


@dataclass(frozen=True)
class MergeTask:
    chunk: Chunk
    outdir: str
    node_range: Tuple[int, int]
    edge_range: Tuple[int, int]
    keep_stats: bool = True


@dataclass
class MergeSummary:
    index: int
    bytes_written: int


def _strip_terminator(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


def copy_rows(source_path: str, destination_path: str, byte_range: Tuple[int, int]) -> int:
    """Copies the rows of `source_path` into `byte_range` of `destination_path`.

    Every row is written back with exactly one `\\n`. The destination must
    already be large enough; the copy never writes outside its range and
    fails if the range is not filled exactly. Returns the bytes written."""
    start, end = byte_range
    position = start
    with open(source_path, "rb") as source, open(destination_path, "r+b") as destination:
        destination.seek(start)
        for line in source:
            row = _strip_terminator(line) + b"\n"
            if position + len(row) > end:
                raise MergeRangeException(
                    "Rows of {} overflow the range [{}, {}) of {}".format(source_path, start, end, destination_path)
                )
            destination.write(row)
            position += len(row)
        destination.flush()

    if position != end:
        raise MergeRangeException(
            "Rows of {} fill only [{}, {}) of the range [{}, {}) of {}".format(
                source_path, start, position, start, end, destination_path
            )
        )
    return position - start


def merge_chunk(task: MergeTask) -> MergeSummary:
    """Writes one chunk's node and edge files into their reserved ranges, then deletes them.

    Ranges of different chunks never overlap, so mergers of the same
    destination file run concurrently without any lock."""
    chunk, outdir = task.chunk, task.outdir
    nodes_path = chunk.nodes_path(outdir)
    edges_path = chunk.edges_path(outdir)

    written = copy_rows(nodes_path, os.path.join(outdir, NODES_FILE), task.node_range)
    written += copy_rows(edges_path, os.path.join(outdir, EDGES_FILE), task.edge_range)

    os.remove(nodes_path)
    os.remove(edges_path)
    if not task.keep_stats:
        os.remove(chunk.stats_path(outdir))

    logger.debug("Merged chunk %d (%d bytes)", chunk.index, written)
    return MergeSummary(chunk.index, written)
