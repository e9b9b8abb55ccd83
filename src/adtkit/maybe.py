"""Maybe: an untagged optional value with no wrapper allocation.

A ``Maybe[T]`` is either the value itself or one of two "nothing" sentinels:
``None`` or ``msgspec.UNSET``. By default both count as nothing; the narrower
``is_none_value`` and ``is_unset`` guards tell them apart, which matters when
``UNSET`` means "field omitted" and ``None`` means "explicitly null".

The combinators (``map``, ``flat_map``, ``filter``, ``zip``, ``apply``) do
not preserve which sentinel they were given: any nothing input yields
``None``, so ``map(UNSET, f)`` is ``None``. Use ``to_unset`` to convert back.

Because there is no tag, a payload that is itself ``None`` or ``UNSET`` cannot
be represented as present: ``just(None)`` is nothing. Use ``adtkit.option``
when the value may legitimately be ``None``.

Example:
    ```python
    from adtkit import maybe

    maybe.map(3, lambda x: x + 1)     # 4
    maybe.map(None, lambda x: x + 1)  # None, the function is not called
    maybe.get_or_else(maybe.nothing_unset(), 0)  # 0
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeIs

from msgspec import UNSET, UnsetType

from adtkit._capture import log_capture, log_raise
from adtkit.errors import UnwrapError

if TYPE_CHECKING:
    from adtkit.option import Option

__all__ = [
    "Maybe",
    "Nothing",
    "apply",
    "filter",
    "flat_map",
    "fold",
    "from_awaitable",
    "from_nullable",
    "from_option",
    "from_predicate",
    "from_throwable",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_none",
    "get_or_raise",
    "is_just",
    "is_none_value",
    "is_nothing",
    "is_unset",
    "just",
    "map",
    "match",
    "nothing",
    "nothing_none",
    "nothing_unset",
    "or_else",
    "tap",
    "tap_nothing",
    "to_option",
    "to_optional",
    "to_unset",
    "unwrap",
    "zip",
]

type Nothing = None | UnsetType
type Maybe[T] = T | None | UnsetType


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def just[T](value: T) -> Maybe[T]:
    """Return value as is; a sentinel passed here stays nothing."""
    return value


def nothing() -> Nothing:
    """The default nothing: None."""
    return None


def nothing_none() -> None:
    return None


def nothing_unset() -> UnsetType:
    return UNSET


def from_nullable[T](value: T | None) -> Maybe[T]:
    return value


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Maybe[T]:
    """value if predicate(value) is true, else None."""
    return value if predicate(value) else None


def from_throwable[T](fn: Callable[[], T]) -> Maybe[T]:
    """Call fn and return its value; a captured exception gives None."""
    try:
        return fn()
    except Exception as e:
        log_capture("maybe.from_throwable", e)
        return None


async def from_awaitable[T](awaitable: Awaitable[T]) -> Maybe[T]:
    """Await a value; a captured exception gives None."""
    try:
        return await awaitable
    except Exception as e:
        log_capture("maybe.from_awaitable", e)
        return None


def from_option[T](option: Option[T]) -> Maybe[T]:
    """Some(v) becomes v, Nothing becomes None."""
    from adtkit.option import Some

    return option.value if isinstance(option, Some) else None


def to_option[T](m: Maybe[T]) -> Option[T]:
    """Wrap a present value in Some; both sentinels become Nothing."""
    from adtkit.option import Nothing as NothingOption
    from adtkit.option import Some

    return NothingOption if is_nothing(m) else Some(m)


def to_optional[T](m: Maybe[T]) -> T | None:
    """Normalize both sentinels to None."""
    return None if is_nothing(m) else m


def to_unset[T](m: Maybe[T]) -> T | UnsetType:
    """Normalize both sentinels to UNSET."""
    return UNSET if is_nothing(m) else m


# ---------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------


def is_just[T](m: Maybe[T]) -> TypeIs[T]:
    """True unless m is None or UNSET."""
    return m is not None and m is not UNSET


def is_nothing[T](m: Maybe[T]) -> TypeIs[Nothing]:
    """True if m is None or UNSET."""
    return m is None or m is UNSET


def is_none_value[T](m: Maybe[T]) -> TypeIs[None]:
    return m is None


def is_unset[T](m: Maybe[T]) -> TypeIs[UnsetType]:
    return m is UNSET


# ---------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------


def map[T, U](m: Maybe[T], fn: Callable[[T], U]) -> Maybe[U]:
    """fn(m) if m is present, else None; fn is not called on nothing."""
    return None if is_nothing(m) else fn(m)


def flat_map[T, U](m: Maybe[T], fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
    # map and flat_map coincide without a wrapper; kept for API parity.
    return None if is_nothing(m) else fn(m)


def filter[T](m: Maybe[T], predicate: Callable[[T], bool]) -> Maybe[T]:
    return m if is_just(m) and predicate(m) else None


def fold[T, U](m: Maybe[T], on_nothing: Callable[[], U], on_just: Callable[[T], U]) -> U:
    return on_nothing() if is_nothing(m) else on_just(m)


def match[T, U](m: Maybe[T], *, just: Callable[[T], U], nothing: Callable[[], U]) -> U:
    """Keyword form of fold: ``match(m, just=..., nothing=...)``."""
    return nothing() if is_nothing(m) else just(m)


def tap[T](m: Maybe[T], fn: Callable[[T], Any]) -> Maybe[T]:
    if is_just(m):
        fn(m)
    return m


def tap_nothing[T](m: Maybe[T], fn: Callable[[], Any]) -> Maybe[T]:
    if is_nothing(m):
        fn()
    return m


# ---------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------


def unwrap[T](m: T) -> T:
    """Return a Maybe already narrowed to its present value."""
    return m


def get_or_else[T](m: Maybe[T], default: T) -> T:
    return default if is_nothing(m) else m


def get_or_else_lazy[T](m: Maybe[T], fn: Callable[[], T]) -> T:
    return fn() if is_nothing(m) else m


def get_or_none[T](m: Maybe[T]) -> T | None:
    return to_optional(m)


def get_or_raise[T](m: Maybe[T], on_error: Callable[[], BaseException] | None = None) -> T:
    """Return the present value, else raise ``on_error()`` or UnwrapError."""
    if is_just(m):
        return m
    log_raise("maybe.get_or_raise", m)
    if on_error is not None:
        raise on_error()
    raise UnwrapError(m, "Maybe is nothing")


# ---------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------


def zip[T, U](a: Maybe[T], b: Maybe[U]) -> Maybe[tuple[T, U]]:
    """(a, b) if both are present, else None."""
    return (a, b) if is_just(a) and is_just(b) else None


def apply[T, U](fn: Maybe[Callable[[T], U]], arg: Maybe[T]) -> Maybe[U]:
    return fn(arg) if is_just(fn) and is_just(arg) else None


def or_else[T](m: Maybe[T], other: Maybe[T]) -> Maybe[T]:
    """m if present, else other unchanged (which may be either sentinel)."""
    return other if is_nothing(m) else m
