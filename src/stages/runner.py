"""
Per-record fan-out over a worker pool.

Records are independent, so per-line work may run on threads or processes.
Results always come back in input order.
"""

from concurrent import futures
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar('T')
R = TypeVar('R')

EXECUTORS = {
    'thread': futures.ThreadPoolExecutor,
    'process': futures.ProcessPoolExecutor,
}


def non_blank(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines that carry something besides whitespace."""
    for line in lines:
        if line.strip():
            yield line


def map_records(
    func: Callable[[T], R],
    records: Iterable[T],
    workers: int = 1,
    executor: str = 'thread',
    chunksize: int = 64,
) -> Iterator[R]:
    """
    Apply func to each record, optionally on a pool.

    Args:
        func: Picklable callable when executor is 'process'
        records: Input records
        workers: Pool size (1 runs inline, lazily)
        executor: 'thread' or 'process'
        chunksize: Records per task for process pools

    Returns:
        Iterator of results in input order. The first exception raised by
        func is re-raised when its result is reached.
    """
    if workers <= 1:
        yield from map(func, records)
        return

    if executor not in EXECUTORS:
        raise ValueError(f"Invalid executor: {executor}")

    with EXECUTORS[executor](max_workers=workers) as pool:
        yield from pool.map(func, records, chunksize=chunksize)
