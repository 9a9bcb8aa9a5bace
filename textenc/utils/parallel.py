from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_ordered(fn: Callable[[int, T], R], items: Sequence[T], max_workers: int | None = None) -> list[R]:
    """Apply ``fn(index, item)`` to every item, keeping input order.

    Runs inline unless ``max_workers`` > 1. Exceptions surface for the lowest
    failing index either way, since ``Executor.map`` yields in submission order.
    """
    if not max_workers or max_workers <= 1 or len(items) <= 1:
        return [fn(i, item) for i, item in enumerate(items)]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(fn, range(len(items)), items))
