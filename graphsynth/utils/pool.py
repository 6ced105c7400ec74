import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence

from tqdm import tqdm

from graphsynth.exceptions import WorkerFailureException

logger = logging.getLogger("graphsynth")


def _executor_class(executor: str):
    if executor == "process":
        return ProcessPoolExecutor
    if executor == "thread":
        return ThreadPoolExecutor
    raise ValueError("Unknown executor {!r}".format(executor))


def run_workers(
    fn: Callable[..., Any],
    tasks: Sequence[Any],
    num_workers: int,
    executor: str = "process",
    description: str = "",
    progress: bool = True,
    unit: str = "chunk",
    total: Optional[int] = None,
    advance: Optional[Callable[[Any], int]] = None,
) -> List[Any]:
    """
    Runs `fn(task)` for every task on a fixed pool and waits for all of them.

    Tasks are never split or rebalanced: each one is a single static unit of
    work. Results are returned in task order once every task has finished.

    Inputs
    ======
    fn: Callable
        A module level function (it must be picklable for the process pool).
    tasks: Sequence
        One argument per call.
    num_workers: int
        The size of the pool.
    total: int
        Size of the progress bar, defaults to the number of tasks.
    advance: Callable
        Maps a finished task's result to the amount the progress bar moves,
        e.g. bytes written. Each finished task counts as one by default.

    Raises
    ======
    WorkerFailureException
        As soon as any task raises. Pending tasks are cancelled and the
        original error is chained.
    """
    results = [None] * len(tasks)
    if not tasks:
        return results

    pool_class = _executor_class(executor)
    with pool_class(max_workers=num_workers) as pool, tqdm(
        total=len(tasks) if total is None else total, desc=description, unit=unit, disable=not progress
    ) as bar:
        future_to_index = {pool.submit(fn, task): index for index, task in enumerate(tasks)}

        try:
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    results[index] = future.result()
                except Exception as exc:
                    logger.error("%s worker %d failed: %s", description or "Pool", index, exc)
                    raise WorkerFailureException(
                        "{} worker {} failed: {}".format(description or "Pool", index, exc), chunk_index=index
                    ) from exc
                bar.update(1 if advance is None else advance(results[index]))
        except WorkerFailureException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise

    return results
