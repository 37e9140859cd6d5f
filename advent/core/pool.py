from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar


T = TypeVar("T")
R = TypeVar("R")


def resolve_workers(requested: int | None, n_items: int) -> int:
    workers = requested or os.cpu_count() or 4
    return max(1, min(workers, n_items))


def parallel_map(fn: Callable[[T], R], items: Iterable[T], workers: int | None = None) -> list[R]:
    """Apply ``fn`` to every item on a thread pool, returning results in input order.

    The first failure in input order is re-raised after any work that has not
    started yet is cancelled.
    """
    items = list(items)
    if not items:
        return []

    with ThreadPoolExecutor(max_workers=resolve_workers(workers, len(items))) as pool:
        futures: list[Future[R]] = [pool.submit(fn, item) for item in items]
        try:
            return [f.result() for f in futures]
        except BaseException:
            for f in futures:
                f.cancel()
            raise
