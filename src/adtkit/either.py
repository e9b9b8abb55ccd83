"""Either type: Left[A] | Right[B] for a value on one of two branches.

The type is symmetric. By convention ``Right`` is the primary branch that
``map``, ``flat_map`` and ``get_or_else`` operate on, and ``Left`` holds the
alternate (usually an error). Nothing enforces that reading; ``swap`` flips
the branches when the other orientation is more convenient.

Example:
    ```python
    from adtkit import either
    from adtkit.either import Left, Right

    either.map(Right(2), lambda x: x + 1)        # Right(value=3)
    either.map_left(Left("e"), str.upper)        # Left(value='E')
    either.fold(Left("e"), len, lambda x: x)     # 1
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from adtkit._capture import log_capture, log_raise
from adtkit.errors import UnwrapError

if TYPE_CHECKING:
    from adtkit.result import Result

__all__ = [
    "Either",
    "Left",
    "Right",
    "apply",
    "bimap",
    "chain",
    "filter",
    "flat_map",
    "fold",
    "from_awaitable",
    "from_nullable",
    "from_predicate",
    "from_result",
    "from_throwable",
    "get_left",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_none",
    "get_or_raise",
    "get_right",
    "is_left",
    "is_right",
    "left",
    "map",
    "map_left",
    "match",
    "or_else",
    "partition",
    "recover",
    "right",
    "swap",
    "tap",
    "tap_left",
    "zip",
]


class Left[A](msgspec.Struct, frozen=True, gc=False, tag=True):
    """Left branch of an Either, conventionally the error/alternate side."""

    value: A

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map[B, C](self, _f: Callable[[B], C]) -> Left[A]:
        """Return self unchanged since map only touches Right."""
        return self

    def map_left[C](self, f: Callable[[A], C]) -> Left[C]:
        """Apply a function to the Left value."""
        return Left(f(self.value))

    def flat_map[B, C](self, _f: Callable[[B], Left[A] | Right[C]]) -> Left[A]:
        """Return self unchanged since flat_map only touches Right."""
        return self

    def fold[C](self, on_left: Callable[[A], C], _on_right: Callable[[Any], C]) -> C:
        """Eliminate by calling on_left with the value."""
        return on_left(self.value)

    def swap(self) -> Right[A]:
        """Move the value to the Right branch."""
        return Right(self.value)


class Right[B](msgspec.Struct, frozen=True, gc=False, tag=True):
    """Right branch of an Either, conventionally the primary/success side."""

    value: B

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map[C](self, f: Callable[[B], C]) -> Right[C]:
        """Apply a function to the Right value."""
        return Right(f(self.value))

    def map_left[A, C](self, _f: Callable[[A], C]) -> Right[B]:
        """Return self unchanged since map_left only touches Left."""
        return self

    def flat_map[A, C](self, f: Callable[[B], Left[A] | Right[C]]) -> Left[A] | Right[C]:
        """Apply a function returning an Either to the Right value."""
        return f(self.value)

    def fold[C](self, _on_left: Callable[[Any], C], on_right: Callable[[B], C]) -> C:
        """Eliminate by calling on_right with the value."""
        return on_right(self.value)

    def swap(self) -> Left[B]:
        """Move the value to the Left branch."""
        return Left(self.value)


type Either[A, B] = Left[A] | Right[B]


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def left[A](value: A) -> Either[A, Any]:
    return Left(value)


def right[B](value: B) -> Either[Any, B]:
    return Right(value)


def from_nullable[A, B](value: B | None, error: A) -> Either[A, B]:
    """Left(error) if value is None, else Right(value)."""
    return Left(error) if value is None else Right(value)


def from_predicate[A, B](value: B, predicate: Callable[[B], bool], on_false: A) -> Either[A, B]:
    """Right(value) if predicate(value) is true, else Left(on_false)."""
    return Right(value) if predicate(value) else Left(on_false)


def from_throwable[A, B](
    fn: Callable[[], B],
    on_error: Callable[[Exception], A] | None = None,
) -> Either[A, B]:
    """Call fn; its return value goes Right, a captured exception goes Left.

    Args:
        fn: Zero-argument callable to invoke once.
        on_error: Converts the captured exception into the Left payload.
            Without it the exception itself is the payload.
    """
    try:
        value = fn()
    except Exception as e:
        log_capture("either.from_throwable", e)
        return Left(e if on_error is None else on_error(e))
    return Right(value)


async def from_awaitable[A, B](
    awaitable: Awaitable[B],
    on_error: Callable[[Exception], A] | None = None,
) -> Either[A, B]:
    """Await a value; fulfilment gives Right, a captured exception gives Left."""
    try:
        value = await awaitable
    except Exception as e:
        log_capture("either.from_awaitable", e)
        return Left(e if on_error is None else on_error(e))
    return Right(value)


def from_result[T, E](r: Result[T, E]) -> Either[E, T]:
    """Ok(v) becomes Right(v), Err(e) becomes Left(e)."""
    from adtkit.result import Ok

    return Right(r.value) if isinstance(r, Ok) else Left(r.error)


# ---------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------


def is_left[A, B](e: Either[A, B]) -> TypeIs[Left[A]]:
    return isinstance(e, Left)


def is_right[A, B](e: Either[A, B]) -> TypeIs[Right[B]]:
    return isinstance(e, Right)


# ---------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------


def map[A, B, C](e: Either[A, B], fn: Callable[[B], C]) -> Either[A, C]:
    """Transform the Right value; Left passes through and fn is not called."""
    return e.map(fn)


def map_left[A, B, C](e: Either[A, B], fn: Callable[[A], C]) -> Either[C, B]:
    """Transform the Left value; Right passes through."""
    return e.map_left(fn)


def bimap[A, B, C, D](e: Either[A, B], on_left: Callable[[A], C], on_right: Callable[[B], D]) -> Either[C, D]:
    """Transform whichever branch is present."""
    if isinstance(e, Left):
        return Left(on_left(e.value))
    return Right(on_right(e.value))


def flat_map[A, B, C](e: Either[A, B], fn: Callable[[B], Either[A, C]]) -> Either[A, C]:
    """Chain a computation returning an Either from the Right value."""
    return e.flat_map(fn)


chain = flat_map


def filter[A, B](e: Either[A, B], predicate: Callable[[B], bool], on_false: A) -> Either[A, B]:
    """Turn Right into Left(on_false) when predicate(value) is false."""
    if isinstance(e, Right) and not predicate(e.value):
        return Left(on_false)
    return e


def fold[A, B, C](e: Either[A, B], on_left: Callable[[A], C], on_right: Callable[[B], C]) -> C:
    """Eliminate an Either into a plain value by calling exactly one handler."""
    return e.fold(on_left, on_right)


def match[A, B, C](e: Either[A, B], *, left: Callable[[A], C], right: Callable[[B], C]) -> C:
    """Keyword form of fold: ``match(e, left=..., right=...)``."""
    return e.fold(left, right)


def swap[A, B](e: Either[A, B]) -> Either[B, A]:
    return e.swap()


def tap[A, B](e: Either[A, B], fn: Callable[[B], Any]) -> Either[A, B]:
    """Call fn with the Right value for side effects; return e unchanged."""
    if isinstance(e, Right):
        fn(e.value)
    return e


def tap_left[A, B](e: Either[A, B], fn: Callable[[A], Any]) -> Either[A, B]:
    """Call fn with the Left value for side effects; return e unchanged."""
    if isinstance(e, Left):
        fn(e.value)
    return e


def recover[A, B](e: Either[A, B], fn: Callable[[A], B]) -> Either[A, B]:
    """Turn Left into Right(fn(value)); Right passes through."""
    if isinstance(e, Left):
        return Right(fn(e.value))
    return e


# ---------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------


def get_left[A](e: Left[A]) -> A:
    """Return the value of an Either already narrowed to Left."""
    return e.value


def get_right[B](e: Right[B]) -> B:
    """Return the value of an Either already narrowed to Right."""
    return e.value


def get_or_else[A, B](e: Either[A, B], default: B) -> B:
    return e.value if isinstance(e, Right) else default


def get_or_else_lazy[A, B](e: Either[A, B], fn: Callable[[A], B]) -> B:
    return e.value if isinstance(e, Right) else fn(e.value)


def get_or_none[A, B](e: Either[A, B]) -> B | None:
    return e.value if isinstance(e, Right) else None


def get_or_raise[A, B](e: Either[A, B], on_error: Callable[[A], BaseException] | None = None) -> B:
    """Return the Right value, else raise.

    Raises:
        BaseException: ``on_error(left_value)`` when given; the Left value
            itself when it is an exception; otherwise UnwrapError.
    """
    if isinstance(e, Right):
        return e.value
    log_raise("either.get_or_raise", e)
    if on_error is not None:
        raise on_error(e.value)
    if isinstance(e.value, BaseException):
        raise e.value
    raise UnwrapError(e, f"Either is Left({e.value!r})")


# ---------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------


def zip[E, A, B](a: Either[E, A], b: Either[E, B]) -> Either[E, tuple[A, B]]:
    """Right((a, b)) if both are Right, else the first Left (a before b)."""
    if isinstance(a, Left):
        return a
    if isinstance(b, Left):
        return b
    return Right((a.value, b.value))


def apply[E, A, B](fn: Either[E, Callable[[A], B]], arg: Either[E, A]) -> Either[E, B]:
    """Apply a wrapped function to a wrapped argument, short-circuiting left to right."""
    if isinstance(fn, Left):
        return fn
    if isinstance(arg, Left):
        return arg
    return Right(fn.value(arg.value))


def or_else[A, B](e: Either[A, B], other: Either[A, B]) -> Either[A, B]:
    """Return e if Right, else other unchanged."""
    return e if isinstance(e, Right) else other


def partition[A, B](es: Iterable[Either[A, B]]) -> tuple[list[A], list[B]]:
    """Split an iterable of Eithers into (lefts, rights), preserving order."""
    lefts: list[A] = []
    rights: list[B] = []
    for e in es:
        if isinstance(e, Left):
            lefts.append(e.value)
        else:
            rights.append(e.value)
    return lefts, rights
