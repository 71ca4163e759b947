"""
collection_ops.py - Neighbourhood views over sequences.
"""

from __future__ import annotations

__all__ = ["pair_wise", "triple_wise", "zip2", "array_of"]

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S")


def pair_wise(items: Sequence[T]) -> list[tuple[T, T]]:
    return list(zip(items, items[1:]))


def triple_wise(items: Sequence[T], looped: bool = False) -> list[tuple[T, T, T]]:
    """Consecutive triples.

    ``looped`` treats ``items`` as a closed ring whose last element repeats
    the first, adding one wrap-around triple at each end.
    """
    if len(items) < 3:
        return []
    triples = list(zip(items, items[1:], items[2:]))
    if looped:
        triples.insert(0, (items[-2], items[0], items[1]))
        triples.append((items[-2], items[-1], items[1]))
    return triples


def zip2(items: Sequence[T], other: Sequence[S]) -> list[tuple[T, S]]:
    return list(zip(items, other))


def array_of(n: int, init: Callable[[], T]) -> list[T]:
    """``n`` values from calling ``init`` once each."""
    return [init() for _ in range(n)]
