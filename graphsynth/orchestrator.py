import os
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from graphsynth import log
from graphsynth.chunk import EDGES_FILE, EDGES_HEADER, NODES_FILE, NODES_HEADER, Chunk
from graphsynth.context import GenerationContext
from graphsynth.generator import ChunkSummary, generate_task
from graphsynth.merger import MergeSummary, MergeTask, merge_chunk
from graphsynth.offsets import OffsetTable, plan_merge
from graphsynth.utils.files import ensure_directory, write_header
from graphsynth.utils.pool import run_workers


class RunState(Enum):
    INIT = "init"
    GENERATING = "generating"
    DONE_EARLY = "done_early"
    PLANNING = "planning"
    MERGING = "merging"
    DONE = "done"


@dataclass
class GenerationResult:
    state: RunState
    chunks: List[Chunk]
    chunk_summaries: List[ChunkSummary] = field(default_factory=list)
    merge_summaries: List[MergeSummary] = field(default_factory=list)
    node_offsets: Optional[OffsetTable] = None
    edge_offsets: Optional[OffsetTable] = None

    @property
    def nodes(self) -> int:
        return sum(summary.nodes for summary in self.chunk_summaries)

    @property
    def edges(self) -> int:
        return sum(summary.edges for summary in self.chunk_summaries)


def _seed_sequences(seed: Optional[int], count: int) -> List[np.random.SeedSequence]:
    return np.random.SeedSequence(seed).spawn(count)


class Orchestrator:
    """Runs one generation end to end.

    INIT -> GENERATING -> DONE_EARLY (incremental mode)
    INIT -> GENERATING -> PLANNING -> MERGING -> DONE

    Each parallel phase is a full barrier and the first error aborts the run."""

    def __init__(self, context: GenerationContext):
        self.context = context
        self.state = RunState.INIT
        self.chunks = context.chunks()

    def _transition(self, state: RunState):
        log.info("{} -> {}".format(self.state.name, state.name))
        self.state = state

    def _init_outputs(self):
        ensure_directory(self.context.outdir)
        write_header(os.path.join(self.context.outdir, NODES_FILE), NODES_HEADER)
        write_header(os.path.join(self.context.outdir, EDGES_FILE), EDGES_HEADER)

    def _generate(self) -> List[ChunkSummary]:
        seeds = _seed_sequences(self.context.seed, len(self.chunks))
        tasks = [(chunk, self.context, seed) for chunk, seed in zip(self.chunks, seeds)]
        return run_workers(
            generate_task,
            tasks,
            self.context.num_workers,
            executor=self.context.executor,
            description="Generating",
            progress=self.context.progress,
        )

    def _merge(self, node_offsets: OffsetTable, edge_offsets: OffsetTable) -> List[MergeSummary]:
        tasks = [
            MergeTask(
                chunk=chunk,
                outdir=self.context.outdir,
                node_range=node_offsets.range_of(chunk.index),
                edge_range=edge_offsets.range_of(chunk.index),
                keep_stats=self.context.keep_stats,
            )
            for chunk in self.chunks
        ]
        merged_bytes = (node_offsets.total - node_offsets.header_length) + (
            edge_offsets.total - edge_offsets.header_length
        )
        return run_workers(
            merge_chunk,
            tasks,
            self.context.num_workers,
            executor=self.context.executor,
            description="Merging",
            progress=self.context.progress,
            unit="B",
            total=merged_bytes,
            advance=lambda summary: summary.bytes_written,
        )

    def run(self) -> GenerationResult:
        log.init("Generating {}".format(self.context))
        start_time = time.time()
        result = GenerationResult(self.state, self.chunks)

        self._init_outputs()

        self._transition(RunState.GENERATING)
        result.chunk_summaries = self._generate()
        log.info(
            "Generated {} nodes and {} edges in {} chunks".format(result.nodes, result.edges, len(self.chunks))
        )

        if self.context.incremental:
            self._transition(RunState.DONE_EARLY)
            result.state = self.state
            log.success("Incremental output kept in {:.2f}s".format(time.time() - start_time))
            return result

        self._transition(RunState.PLANNING)
        result.node_offsets, result.edge_offsets = plan_merge(self.chunks, self.context.outdir)

        self._transition(RunState.MERGING)
        result.merge_summaries = self._merge(result.node_offsets, result.edge_offsets)

        self._transition(RunState.DONE)
        result.state = self.state
        log.success(
            "Merged {} bytes into {} and {} in {:.2f}s".format(
                sum(summary.bytes_written for summary in result.merge_summaries),
                NODES_FILE,
                EDGES_FILE,
                time.time() - start_time,
            )
        )
        return result


def generate(context: GenerationContext) -> GenerationResult:
    return Orchestrator(context).run()
