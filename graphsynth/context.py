from typing import Any, Dict, List

from graphsynth.chunk import Chunk, partition
from graphsynth.distributions import Distribution
from graphsynth.exceptions import IncorrectParametersException
from graphsynth.parameters import Parameter

EXECUTOR_PROCESS = "process"
EXECUTOR_THREAD = "thread"
EXECUTORS = (EXECUTOR_PROCESS, EXECUTOR_THREAD)

DEFAULT_NUM_WORKERS = 8


class GenerationContext:
    """
    Class for holding every parameter of a single generation run
    """

    def __init__(
        self,
        n_nodes: int = None,
        min_prop_size: int = None,
        max_prop_size: int = None,
        edge_dist: Any = None,
        node_prop_dist: Any = None,
        edge_prop_dist: Any = Distribution.NONE,
        outdir: str = ".",
        num_workers: int = DEFAULT_NUM_WORKERS,
        incremental: bool = False,
        seed: int = None,
        keep_stats: bool = True,
        executor: str = EXECUTOR_PROCESS,
        progress: bool = True,
    ) -> None:
        for name, value in (
            ("n_nodes", n_nodes),
            ("min_prop_size", min_prop_size),
            ("max_prop_size", max_prop_size),
            ("edge_dist", edge_dist),
            ("node_prop_dist", node_prop_dist),
        ):
            if value is None:
                raise IncorrectParametersException("Missing parameter {}.".format(name))

        self.n_nodes = n_nodes
        self.min_prop_size = min_prop_size
        self.max_prop_size = max_prop_size
        self.edge_dist = Distribution.parse(edge_dist)
        self.node_prop_dist = Distribution.parse(node_prop_dist)
        self.edge_prop_dist = Distribution.parse(edge_prop_dist)
        self.outdir = outdir
        self.num_workers = num_workers
        self.incremental = incremental
        self.seed = seed
        self.keep_stats = keep_stats
        self.executor = executor
        self.progress = progress

        self._validate()

    def _validate(self):
        if self.n_nodes < 0:
            raise IncorrectParametersException("Number of nodes must not be negative, got {}.".format(self.n_nodes))
        if self.min_prop_size < 0 or self.max_prop_size < 0:
            raise IncorrectParametersException("Property sizes must not be negative.")
        if self.min_prop_size > self.max_prop_size:
            raise IncorrectParametersException(
                "Minimum property size {} is greater than maximum property size {}.".format(
                    self.min_prop_size, self.max_prop_size
                )
            )
        if self.num_workers < 1:
            raise IncorrectParametersException("Number of workers must be positive, got {}.".format(self.num_workers))
        if self.executor not in EXECUTORS:
            raise IncorrectParametersException(
                "Unknown executor {!r}, expected one of: {}.".format(self.executor, ", ".join(EXECUTORS))
            )

    @classmethod
    def from_parameters(cls, parameters: Dict[Any, Any]) -> "GenerationContext":
        """Builds a context from a mapping keyed by `Parameter` members or their values."""
        kwargs = {}
        for key, value in parameters.items():
            try:
                param = key if isinstance(key, Parameter) else Parameter(key)
            except ValueError:
                raise IncorrectParametersException("Parameter {} is incorrect.".format(key)) from None
            if value is not None:
                kwargs[param.value] = value
        return cls(**kwargs)

    @property
    def prop_range(self) -> int:
        return self.max_prop_size - self.min_prop_size

    def chunks(self) -> List[Chunk]:
        return partition(self.n_nodes, self.num_workers)

    def __repr__(self):
        return (
            "GenerationContext(n_nodes={}, props=[{}, {}], edge_dist={}, node_prop_dist={}, "
            "edge_prop_dist={}, num_workers={}, incremental={})".format(
                self.n_nodes,
                self.min_prop_size,
                self.max_prop_size,
                self.edge_dist.value,
                self.node_prop_dist.value,
                self.edge_prop_dist.value,
                self.num_workers,
                self.incremental,
            )
        )
