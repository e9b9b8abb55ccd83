"""Pair: an immutable two-slot product with per-side transformation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import msgspec

__all__ = [
    "Pair",
    "bimap",
    "fst",
    "map_first",
    "map_second",
    "pair",
    "snd",
    "swap",
    "to_tuple",
]


class Pair[A, B](msgspec.Struct, frozen=True, gc=False, array_like=True):
    """Two values held together, addressed as ``first`` and ``second``.

    Encodes as a two-element array and unpacks like a tuple.

    Examples:
        >>> p = Pair(1, "a")
        >>> p.map_first(lambda x: x + 1)
        Pair(first=2, second='a')
        >>> first, second = p
    """

    first: A
    second: B

    def map_first[C](self, f: Callable[[A], C]) -> Pair[C, B]:
        return Pair(f(self.first), self.second)

    def map_second[C](self, f: Callable[[B], C]) -> Pair[A, C]:
        return Pair(self.first, f(self.second))

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second


def pair[A, B](first: A, second: B) -> Pair[A, B]:
    return Pair(first, second)


def fst[A, B](p: Pair[A, B]) -> A:
    return p.first


def snd[A, B](p: Pair[A, B]) -> B:
    return p.second


def map_first[A, B, C](p: Pair[A, B], f: Callable[[A], C]) -> Pair[C, B]:
    """Transform the first slot, keeping the second."""
    return p.map_first(f)


def map_second[A, B, C](p: Pair[A, B], f: Callable[[B], C]) -> Pair[A, C]:
    """Transform the second slot, keeping the first."""
    return p.map_second(f)


def bimap[A, B, C, D](p: Pair[A, B], f: Callable[[A], C], g: Callable[[B], D]) -> Pair[C, D]:
    """Transform both slots with independent functions, first then second."""
    return Pair(f(p.first), g(p.second))


def swap[A, B](p: Pair[A, B]) -> Pair[B, A]:
    return Pair(p.second, p.first)


def to_tuple[A, B](p: Pair[A, B]) -> tuple[A, B]:
    return (p.first, p.second)
