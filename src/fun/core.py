"""Generic map, left-fold reduce and filter over sequences.

The functions shadow the builtins of the same name inside this
module; callers usually import them as ``fun.map`` and friends.
"""

from __future__ import annotations

from typing import Sequence

from .typing import A, I, IN, OUT, Accumulator, Predicate, T, Transform


def map(fn: Transform[IN, OUT], data: Sequence[IN]) -> list[OUT]:
    """Apply ``fn`` to every item of ``data`` and return the results as a list.

    ``fn`` is called exactly once per item, in index order.

    Example
    -------
    >>> map(float, [1, 2, 3, 4])
    [1.0, 2.0, 3.0, 4.0]
    """

    return [fn(item) for item in data]


def reduce(fn: Accumulator[A, I], data: Sequence[I], init: A) -> A:
    """Fold ``data`` from left to right with ``fn``, starting from ``init``.

    Computes ``fn(...fn(fn(init, data[0]), data[1])..., data[-1])``. An empty
    ``data`` returns ``init`` itself and never calls ``fn``.

    Example
    -------
    >>> reduce(lambda acc, item: acc + item**2, [1, 2, 3, 4], 1)
    31
    """

    acc = init
    for item in data:
        acc = fn(acc, item)
    return acc


def filter(fn: Predicate[T], data: Sequence[T]) -> list[T]:
    """Return the items of ``data`` for which ``fn(item)`` is true, in order."""

    filtered: list[T] = []
    for item in data:
        if fn(item):
            filtered.append(item)

    # copy to drop the spare capacity left by append
    return filtered[:]


__all__ = ["map", "reduce", "filter"]
