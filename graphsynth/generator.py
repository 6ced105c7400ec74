import logging
from dataclasses import dataclass

import numpy as np

from graphsynth.chunk import Chunk
from graphsynth.context import GenerationContext
from graphsynth.distributions import Distribution, edge_count, property_length, raw_byte_count
from graphsynth.utils.encoding import encode_property

logger = logging.getLogger("graphsynth")


@dataclass
class ChunkSummary:
    index: int
    nodes: int = 0
    edges: int = 0
    node_bytes: int = 0
    edge_bytes: int = 0


def _sample_property(
    rng: np.random.Generator, distribution: Distribution, min_size: int, max_size: int
) -> bytes:
    length = property_length(distribution, rng, min_size, max_size)
    return encode_property(rng.bytes(raw_byte_count(length))).encode("ascii")


def generate_chunk(chunk: Chunk, context: GenerationContext, seed_sequence: np.random.SeedSequence) -> ChunkSummary:
    """Writes the node, edge and stats rows of every id in `chunk`.

    Node rows are `<id>` or `<id>|<property>`, edge rows `<src>|<dst>` or
    `<src>|<dst>|<property>`, stats rows `<id> <out_degree>`. Edge
    destinations are drawn from [0, n_nodes), or from [0, chunk.end) in
    incremental mode so no edge references an id that a reader consuming
    chunks in order has not seen yet.

    Nothing is shared with other workers: the files are private to the chunk
    and the random generator is built from the chunk's own seed sequence."""
    rng = np.random.default_rng(seed_sequence)
    summary = ChunkSummary(chunk.index)

    dst_upper = chunk.end if context.incremental else context.n_nodes
    node_props = context.node_prop_dist is not Distribution.NONE
    edge_props = context.edge_prop_dist is not Distribution.NONE
    min_size, max_size = context.min_prop_size, context.max_prop_size

    rows = []
    with open(chunk.nodes_path(context.outdir), "wb") as node_file, open(
        chunk.edges_path(context.outdir), "wb"
    ) as edge_file, open(chunk.stats_path(context.outdir), "wb") as stats_file:
        for node_id in range(chunk.start, chunk.end):
            src = str(node_id).encode("ascii")
            if node_props:
                row = b"%s|%s\n" % (src, _sample_property(rng, context.node_prop_dist, min_size, max_size))
            else:
                row = src + b"\n"
            node_file.write(row)
            summary.node_bytes += len(row)

            n_edges = edge_count(context.edge_dist, rng)
            stats_file.write(b"%s %d\n" % (src, n_edges))
            if n_edges == 0:
                continue

            rows.clear()
            for dst in rng.integers(0, dst_upper, size=n_edges).tolist():
                if edge_props:
                    prop = _sample_property(rng, context.edge_prop_dist, min_size, max_size)
                    rows.append(b"%s|%d|%s\n" % (src, dst, prop))
                else:
                    rows.append(b"%s|%d\n" % (src, dst))
            edge_file.writelines(rows)
            summary.edge_bytes += sum(len(row) for row in rows)
            summary.edges += n_edges

        summary.nodes = len(chunk)

    logger.debug(
        "Chunk %d [%d, %d): %d nodes, %d edges", chunk.index, chunk.start, chunk.end, summary.nodes, summary.edges
    )
    return summary


def generate_task(task) -> ChunkSummary:
    """Pool entry point taking a `(chunk, context, seed_sequence)` tuple."""
    return generate_chunk(*task)
