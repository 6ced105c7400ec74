import os
from dataclasses import dataclass
from typing import List

from graphsynth.exceptions import IncorrectParametersException

NODES_FILE = "nodes.csv"
EDGES_FILE = "edges.csv"

NODES_HEADER = b"NodeID|data\n"
EDGES_HEADER = b"SrcID|DstID\n"


@dataclass(frozen=True)
class Chunk:
    """A half-open node id range [start, end) owned by a single worker.

    The chunk also names the three private files its worker produces."""

    index: int
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, node_id: int) -> bool:
        return self.start <= node_id < self.end

    def nodes_path(self, outdir: str) -> str:
        return os.path.join(outdir, "nodes_{}.csv".format(self.index))

    def edges_path(self, outdir: str) -> str:
        return os.path.join(outdir, "edges_{}.csv".format(self.index))

    def stats_path(self, outdir: str) -> str:
        return os.path.join(outdir, "stats_{}.txt".format(self.index))


def partition(n_nodes: int, num_chunks: int) -> List[Chunk]:
    """Splits [0, n_nodes) into `num_chunks` contiguous chunks in id order.

    Every chunk but the last spans n_nodes // num_chunks ids; the last one
    absorbs the remainder and always ends at n_nodes."""
    if num_chunks < 1:
        raise IncorrectParametersException("Number of chunks must be positive, got {}.".format(num_chunks))
    if n_nodes < 0:
        raise IncorrectParametersException("Number of nodes must not be negative, got {}.".format(n_nodes))

    chunk_size = n_nodes // num_chunks
    chunks = []
    for index in range(num_chunks):
        start = chunk_size * index
        end = n_nodes if index == num_chunks - 1 else min(chunk_size * (index + 1), n_nodes)
        chunks.append(Chunk(index, start, end))
    return chunks
