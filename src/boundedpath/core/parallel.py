"""Batched parallel-for execution.

Per-element work with no shared mutable state (smoothing taps, coordinate
conversion) is expressed as a function of the element index and scheduled
in contiguous batches. The batch size is only a throughput knob: results
are always returned in index order and equal a plain sequential loop.

Sequential, stateful work (triangulation) does not go through this module;
it is a plain synchronous call.
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


def iter_batches(count: int, batch_size: int) -> list[range]:
    """Split range(count) into contiguous batches of batch_size indices.

    The last batch may be shorter.

    Args:
        count: Number of elements
        batch_size: Indices per batch (minimum granularity)

    Returns:
        List of index ranges covering 0..count-1 in order

    Raises:
        ValueError: If batch_size is not positive
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [range(start, min(start + batch_size, count)) for start in range(0, count, batch_size)]


def _run_batch(func: Callable[[int], T], indices: range) -> list[T]:
    return [func(i) for i in indices]


def parallel_for(
    count: int,
    func: Callable[[int], T],
    batch_size: int,
    max_workers: int | None = None,
) -> list[T]:
    """Evaluate func for every index in range(count), batched across threads.

    Args:
        count: Number of elements
        func: Per-element function of the element index; must only read shared data
        batch_size: Minimum number of indices handled per scheduled batch
        max_workers: Thread count (None = executor default, 1 = run inline)

    Returns:
        [func(0), func(1), ..., func(count - 1)]
    """
    batches = iter_batches(count, batch_size)

    if len(batches) <= 1 or max_workers == 1:
        return [result for batch in batches for result in _run_batch(func, batch)]

    results: list[T] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for batch_results in executor.map(lambda batch: _run_batch(func, batch), batches):
            results.extend(batch_results)
    return results
