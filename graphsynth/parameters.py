from enum import Enum


class Parameter(Enum):
    N_NODES = "n_nodes"
    MIN_PROP_SIZE = "min_prop_size"
    MAX_PROP_SIZE = "max_prop_size"

    EDGE_DIST = "edge_dist"
    NODE_PROP_DIST = "node_prop_dist"
    EDGE_PROP_DIST = "edge_prop_dist"

    OUTDIR = "outdir"
    NUM_WORKERS = "num_workers"
    EXECUTOR = "executor"

    INCREMENTAL = "incremental"
    KEEP_STATS = "keep_stats"
    SEED = "seed"
    PROGRESS = "progress"
