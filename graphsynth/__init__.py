from graphsynth.chunk import (  # noqa: F401, F402, F403
  EDGES_FILE,
  EDGES_HEADER,
  NODES_FILE,
  NODES_HEADER,
  Chunk,
  partition,
)
from graphsynth.context import GenerationContext  # noqa: F401, F402, F403
from graphsynth.distributions import (  # noqa: F401, F402, F403
  PROPERTY_SCALE_DIVISOR,
  Distribution,
  edge_count,
  property_length,
  raw_byte_count,
  sample_fraction,
)
from graphsynth.exceptions import (  # noqa: F401, F402, F403
  IncorrectParametersException,
  MergeRangeException,
  WorkerFailureException,
)
from graphsynth.generator import ChunkSummary, generate_chunk  # noqa: F401, F402, F403
from graphsynth.merger import MergeSummary, MergeTask, copy_rows, merge_chunk  # noqa: F401, F402, F403
from graphsynth.offsets import OffsetTable, plan_merge, plan_offsets, reserve  # noqa: F401, F402, F403
from graphsynth.orchestrator import GenerationResult, Orchestrator, RunState, generate  # noqa: F401, F402, F403
from graphsynth.parameters import Parameter  # noqa: F401, F402, F403
