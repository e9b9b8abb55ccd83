"""Option type: Some[T] | Nothing for optional values.

Option makes presence explicit with a tag, so ``Some(None)`` is a perfectly
good present value and is never confused with ``Nothing``.

Example:
    ```python
    from adtkit import option
    from adtkit.option import Nothing, Some

    option.map(Some(21), lambda x: x * 2)   # Some(value=42)
    option.map(Nothing, lambda x: x * 2)    # Nothing
    option.get_or_else(option.from_nullable(None), 0)  # 0
    ```

The module doubles as the ``Option`` namespace: every operation is a free
function taking the option as its first argument.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from adtkit._capture import log_capture, log_raise
from adtkit.errors import UnwrapError

if TYPE_CHECKING:
    from adtkit.result import Result

__all__ = [
    "Nothing",
    "NothingType",
    "Option",
    "Some",
    "apply",
    "collect",
    "filter",
    "first",
    "flat_map",
    "flatten",
    "fold",
    "from_awaitable",
    "from_nullable",
    "from_predicate",
    "from_throwable",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_none",
    "get_or_raise",
    "is_none",
    "is_some",
    "map",
    "match",
    "none",
    "or_else",
    "some",
    "tap",
    "tap_none",
    "to_result",
    "unwrap",
    "zip",
]


class Some[T](msgspec.Struct, frozen=True, gc=False, tag=True):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as and_then or bind.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def or_else(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def fold[U](self, _on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """Eliminate the option by calling on_some with the value."""
        return on_some(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False, tag=True):
    """Nothing variant of Option representing absence of a value.

    This is a singleton in practice - use the ``Nothing`` constant instead of
    instantiating directly. All instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, "Called unwrap on Nothing")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def or_else[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def fold[T, U](self, on_none: Callable[[], U], _on_some: Callable[[T], U]) -> U:
        """Eliminate the option by calling on_none."""
        return on_none()

    def __repr__(self) -> str:
        return "Nothing"


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def none[T]() -> Option[T]:
    """Return Nothing."""
    return Nothing


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some."""
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """Nothing if value is None, else Some(value)."""
    return Nothing if value is None else Some(value)


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Option[T]:
    """Some(value) if predicate(value) is true, else Nothing."""
    return Some(value) if predicate(value) else Nothing


def from_throwable[T](fn: Callable[[], T]) -> Option[T]:
    """Call fn and wrap its return value; a captured exception becomes Nothing.

    Args:
        fn: Zero-argument callable to invoke once.

    Returns:
        Some(fn()) on normal return, Nothing if fn raised a captured exception.
    """
    try:
        value = fn()
    except Exception as e:
        log_capture("option.from_throwable", e)
        return Nothing
    return Some(value)


async def from_awaitable[T](awaitable: Awaitable[T]) -> Option[T]:
    """Await a value; fulfilment gives Some, a captured exception gives Nothing."""
    try:
        value = await awaitable
    except Exception as e:
        log_capture("option.from_awaitable", e)
        return Nothing
    return Some(value)


def first[T](items: Iterable[T]) -> Option[T]:
    """Some of the first element of items, or Nothing if it is empty.

    Presence decides, not truthiness: ``first([0]) == Some(0)``.
    """
    for item in items:
        return Some(item)
    return Nothing


# ---------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option contains a value."""
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeIs[NothingType]:
    """Check if an Option is Nothing."""
    return isinstance(option, NothingType)


# ---------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------


def map[T, U](option: Option[T], fn: Callable[[T], U]) -> Option[U]:
    """Transform the value if Some; Nothing passes through and fn is not called."""
    return option.map(fn)


def flat_map[T, U](option: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation returning an Option."""
    return option.flat_map(fn)


def filter[T](option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep Some only if predicate(value) holds."""
    return option.filter(predicate)


def fold[T, U](option: Option[T], on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
    """Eliminate an Option into a plain value by calling exactly one handler."""
    return option.fold(on_none, on_some)


def match[T, U](option: Option[T], *, some: Callable[[T], U], none: Callable[[], U]) -> U:
    """Keyword form of fold: ``match(o, some=..., none=...)``."""
    return option.fold(none, some)


def tap[T](option: Option[T], fn: Callable[[T], Any]) -> Option[T]:
    """Call fn with the value for side effects if Some; return the option unchanged."""
    if isinstance(option, Some):
        fn(option.value)
    return option


def tap_none[T](option: Option[T], fn: Callable[[], Any]) -> Option[T]:
    """Call fn for side effects if Nothing; return the option unchanged."""
    if isinstance(option, NothingType):
        fn()
    return option


def flatten[T](option: Option[Option[T]]) -> Option[T]:
    # Some(Some(v)) -> Some(v)
    # Some(Nothing) -> Nothing
    # Nothing       -> Nothing
    return option.value if isinstance(option, Some) else Nothing


# ---------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------


def unwrap[T](option: Some[T]) -> T:
    """Return the value of an Option already narrowed to Some."""
    return option.value


def get_or_else[T](option: Option[T], default: T) -> T:
    """Return the value if Some, else default."""
    return option.unwrap_or(default)


def get_or_else_lazy[T](option: Option[T], fn: Callable[[], T]) -> T:
    """Return the value if Some, else compute a default."""
    return option.value if isinstance(option, Some) else fn()


def get_or_none[T](option: Option[T]) -> T | None:
    """Return the value if Some, else None."""
    return option.value if isinstance(option, Some) else None


def get_or_raise[T](option: Option[T], on_error: Callable[[], BaseException] | None = None) -> T:
    """Return the value if Some, else raise.

    Args:
        option: The Option to extract from.
        on_error: Factory for the exception to raise on Nothing.

    Returns:
        T: The contained value.

    Raises:
        UnwrapError: On Nothing when no factory was given.
    """
    if isinstance(option, Some):
        return option.value
    log_raise("option.get_or_raise", option)
    if on_error is not None:
        raise on_error()
    raise UnwrapError(option, "Option is Nothing")


# ---------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------


def zip[T, U](a: Option[T], b: Option[U]) -> Option[tuple[T, U]]:
    """Some((a, b)) if both are Some, else Nothing."""
    if isinstance(a, Some) and isinstance(b, Some):
        return Some((a.value, b.value))
    return Nothing


def apply[T, U](fn: Option[Callable[[T], U]], arg: Option[T]) -> Option[U]:
    """Apply a wrapped function to a wrapped argument."""
    if isinstance(fn, Some) and isinstance(arg, Some):
        return Some(fn.value(arg.value))
    return Nothing


def or_else[T](option: Option[T], other: Option[T]) -> Option[T]:
    """Return option if Some, else other unchanged."""
    return option.or_else(other)


def collect[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect the values of an iterable of Options, short-circuiting on the first Nothing."""
    out: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return Nothing
        out.append(option.value)
    return Some(out)


def to_result[T, E](option: Option[T], error: E) -> Result[T, E]:
    """Ok(value) if Some, else Err(error)."""
    from adtkit.result import Err, Ok

    return Ok(option.value) if isinstance(option, Some) else Err(error)
