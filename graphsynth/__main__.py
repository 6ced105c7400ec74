#!/usr/bin/env python3

import argparse
import sys

from graphsynth import log
from graphsynth.context import DEFAULT_NUM_WORKERS, EXECUTORS, GenerationContext
from graphsynth.distributions import Distribution
from graphsynth.exceptions import IncorrectParametersException, MergeRangeException, WorkerFailureException
from graphsynth.orchestrator import generate
from graphsynth.parameters import Parameter

DISTRIBUTIONS = [distribution.value for distribution in Distribution] + ["exp"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate graphs with different edge and property distributions.")

    parser.add_argument("n_nodes", type=int, help="number of nodes")
    parser.add_argument("min_prop_size", type=int, help="minimum property size (bytes)")
    parser.add_argument("max_prop_size", type=int, help="maximum property size (bytes)")

    parser.add_argument(
        "--edge-dist",
        required=True,
        choices=DISTRIBUTIONS,
        help="distribution of the number of outgoing edges per node",
    )
    parser.add_argument(
        "--prop-dist",
        required=True,
        choices=DISTRIBUTIONS,
        help="distribution of the node property size",
    )
    parser.add_argument(
        "--edge-prop-dist",
        default=Distribution.NONE.value,
        choices=DISTRIBUTIONS,
        help="distribution of the edge property size; edges carry no property by default",
    )
    parser.add_argument("--outdir", default=".", help="output directory")
    parser.add_argument("--nprocs", type=int, default=DEFAULT_NUM_WORKERS, help="number of workers")
    parser.add_argument(
        "--incremental",
        action="store_true",
        default=False,
        help="keep the per chunk files as the result and skip merging; "
        "edges only point to nodes of the same or an earlier chunk",
    )
    parser.add_argument("--seed", type=int, default=None, help="root seed for reproducible output")
    parser.add_argument(
        "--discard-stats",
        action="store_true",
        default=False,
        help="delete the per chunk stats files after merging",
    )
    parser.add_argument("--executor", default=EXECUTORS[0], choices=EXECUTORS, help="kind of worker pool")
    parser.add_argument("--no-progress", action="store_true", default=False, help="disable progress bars")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level",
    )
    parser.add_argument("--log-file", default=None, help="also write logs to this file")

    return parser.parse_args(argv)


def context_from_args(args) -> GenerationContext:
    return GenerationContext.from_parameters(
        {
            Parameter.N_NODES: args.n_nodes,
            Parameter.MIN_PROP_SIZE: args.min_prop_size,
            Parameter.MAX_PROP_SIZE: args.max_prop_size,
            Parameter.EDGE_DIST: args.edge_dist,
            Parameter.NODE_PROP_DIST: args.prop_dist,
            Parameter.EDGE_PROP_DIST: args.edge_prop_dist,
            Parameter.OUTDIR: args.outdir,
            Parameter.NUM_WORKERS: args.nprocs,
            Parameter.INCREMENTAL: args.incremental,
            Parameter.SEED: args.seed,
            Parameter.KEEP_STATS: not args.discard_stats,
            Parameter.EXECUTOR: args.executor,
            Parameter.PROGRESS: not args.no_progress,
        }
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    log.setup(args.log_level, args.log_file)

    try:
        context = context_from_args(args)
        generate(context)
    except IncorrectParametersException as e:
        log.error("Invalid parameters: {}".format(e))
        return 1
    except WorkerFailureException as e:
        log.error("Worker failed: {} (caused by {!r})".format(e, e.__cause__))
        return 1
    except MergeRangeException as e:
        log.error("Merge planning failed: {}".format(e))
        return 1
    except OSError as e:
        log.error("I/O error: {}".format(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
