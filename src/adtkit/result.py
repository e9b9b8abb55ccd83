"""Result type: Ok[T] | Err[E] for explicit success/failure.

Result carries the same shape as Either but names its branches for what they
mean: ``Ok`` holds the value of a computation that succeeded, ``Err`` holds
whatever describes the failure (an exception, a message, a struct).

Example:
    ```python
    from adtkit import result
    from adtkit.result import Err, Ok

    def parse_port(raw: str) -> result.Result[int, str]:
        return result.filter(
            result.from_throwable(lambda: int(raw), lambda e: f"not a number: {raw!r}"),
            lambda port: 0 < port < 65536,
            "out of range",
        )

    parse_port("8080")   # Ok(value=8080)
    parse_port("http")   # Err(error="not a number: 'http'")
    parse_port("70000")  # Err(error='out of range')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from adtkit._capture import CAPTURED, log_capture, log_raise
from adtkit.errors import UnwrapError

if TYPE_CHECKING:
    from adtkit.either import Either
    from adtkit.option import Option

__all__ = [
    "Err",
    "Ok",
    "Result",
    "apply",
    "bimap",
    "collect",
    "err",
    "filter",
    "flat_map",
    "flatten",
    "fold",
    "from_awaitable",
    "from_either",
    "from_nullable",
    "from_predicate",
    "from_throwable",
    "get_or_else",
    "get_or_else_lazy",
    "get_or_none",
    "get_or_raise",
    "is_err",
    "is_ok",
    "map",
    "map_err",
    "match",
    "ok",
    "or_else",
    "partition",
    "recover",
    "tap",
    "tap_err",
    "to_option",
    "unwrap",
    "unwrap_err",
    "zip",
]


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> bool:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, f"Called unwrap_err on Ok({self.value!r})")

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as and_then or bind.
        """
        return f(self.value)

    def or_else[E](self, _other: Ok[T] | Err[E]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def fold[U](self, _on_err: Callable[[Any], U], on_ok: Callable[[T], U]) -> U:
        """Eliminate the result by calling on_ok with the value."""
        return on_ok(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False, tag=True):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err("failed")
        >>> err.unwrap_or(0)
        0
        >>> err.map_err(str.upper)
        Err(error='FAILED')
    """

    error: E

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> bool:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, f"Called unwrap on Err({self.error!r})")

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def flat_map[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since self is Err."""
        return other

    def fold[U](self, on_err: Callable[[E], U], _on_ok: Callable[[Any], U]) -> U:
        """Eliminate the result by calling on_err with the error."""
        return on_err(self.error)


type Result[T, E] = Ok[T] | Err[E]


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def ok[T](value: T) -> Result[T, Any]:
    """Wrap a value in Ok."""
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Wrap an error in Err."""
    return Err(error)


def from_nullable[T, E](value: T | None, error: E) -> Result[T, E]:
    """Err(error) if value is None, else Ok(value)."""
    return Err(error) if value is None else Ok(value)


def from_predicate[T, E](value: T, predicate: Callable[[T], bool], on_false: E) -> Result[T, E]:
    """Ok(value) if predicate(value) is true, else Err(on_false)."""
    return Ok(value) if predicate(value) else Err(on_false)


def _call_capturing[T, X: BaseException](
    fn: Callable[[], T],
    exceptions: tuple[type[X], ...],
    source: str,
) -> Result[T, X]:
    try:
        value = fn()
    except exceptions as e:
        log_capture(source, e)
        return Err(e)
    return Ok(value)


async def _await_capturing[T, X: BaseException](
    awaitable: Awaitable[T],
    exceptions: tuple[type[X], ...],
    source: str,
) -> Result[T, X]:
    try:
        value = await awaitable
    except exceptions as e:
        log_capture(source, e)
        return Err(e)
    return Ok(value)


def from_throwable[T, E](
    fn: Callable[[], T],
    on_error: Callable[[Exception], E] | None = None,
) -> Result[T, E]:
    """Call fn and capture a raised exception as Err.

    Any ``Exception`` is captured. ``BaseException`` subclasses such as
    ``KeyboardInterrupt`` propagate.

    Args:
        fn: Zero-argument callable to invoke once.
        on_error: Converts the captured exception into the error payload.
            Without it the exception itself is the payload.

    Returns:
        Ok(fn()) on normal return, Err(...) if fn raised.

    Example:
        ```python
        from_throwable(lambda: 1 / 0, lambda e: type(e).__name__)
        # Err(error='ZeroDivisionError')
        ```
    """
    r = _call_capturing(fn, CAPTURED, "result.from_throwable")
    return r if on_error is None else r.map_err(on_error)


async def from_awaitable[T, E](
    awaitable: Awaitable[T],
    on_error: Callable[[Exception], E] | None = None,
) -> Result[T, E]:
    """Await a value; fulfilment gives Ok, a raised exception gives Err.

    on_error is called at most once. Cancellation propagates unchanged.
    """
    r = await _await_capturing(awaitable, CAPTURED, "result.from_awaitable")
    return r if on_error is None else r.map_err(on_error)


def from_either[A, B](either: Either[A, B]) -> Result[B, A]:
    """Right(v) becomes Ok(v), Left(e) becomes Err(e)."""
    from adtkit.either import Right

    return Ok(either.value) if isinstance(either, Right) else Err(either.value)


# ---------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------


def is_ok[T, E](r: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if a Result is Ok.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Ok, False if Err.
    """
    return isinstance(r, Ok)


def is_err[T, E](r: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if a Result is Err.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Err, False if Ok.
    """
    return isinstance(r, Err)


# ---------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------


def map[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Transform the value of a Result if Ok.

    Args:
        r: The Result to transform.
        f: Function to apply to the value if Ok. Never called for Err.

    Returns:
        Result[U, E]: A new Result with the transformed value if Ok, otherwise the original Err.
    """
    return r.map(f)


def map_err[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of a Result if Err.

    Args:
        r: The Result to transform.
        f: Function to apply to the error if Err.

    Returns:
        Result[T, F]: A new Result with the transformed error if Err, otherwise the original Ok.
    """
    return r.map_err(f)


def bimap[T, E, U, F](r: Result[T, E], on_ok: Callable[[T], U], on_err: Callable[[E], F]) -> Result[U, F]:
    """Transform whichever side is present."""
    if isinstance(r, Ok):
        return Ok(on_ok(r.value))
    return Err(on_err(r.error))


def flat_map[T, U, E](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation that may fail.

    Args:
        r: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        Result[U, E]: The result of applying f if Ok, otherwise the original Err.
    """
    return r.flat_map(f)


def filter[T, E](r: Result[T, E], predicate: Callable[[T], bool], on_false: E) -> Result[T, E]:
    """Turn Ok into Err(on_false) when predicate(value) is false."""
    if isinstance(r, Ok) and not predicate(r.value):
        return Err(on_false)
    return r


def fold[T, E, U](r: Result[T, E], on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> U:
    """Eliminate a Result into a plain value by calling exactly one handler."""
    return r.fold(on_err, on_ok)


def match[T, E, U](r: Result[T, E], *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
    """Keyword form of fold: ``match(r, ok=..., err=...)``."""
    return r.fold(err, ok)


def tap[T, E](r: Result[T, E], f: Callable[[T], Any]) -> Result[T, E]:
    """Call a function with the value for side effects if Ok.

    Args:
        r: The Result to inspect.
        f: Function to call with the value if Ok.

    Returns:
        Result[T, E]: The original Result unchanged.
    """
    if isinstance(r, Ok):
        f(r.value)
    return r


def tap_err[T, E](r: Result[T, E], f: Callable[[E], Any]) -> Result[T, E]:
    """Call a function with the error for side effects if Err.

    Args:
        r: The Result to inspect.
        f: Function to call with the error if Err.

    Returns:
        Result[T, E]: The original Result unchanged.
    """
    if isinstance(r, Err):
        f(r.error)
    return r


def recover[T, E](r: Result[T, E], f: Callable[[E], T]) -> Result[T, E]:
    """Turn Err into Ok(f(error)); Ok passes through."""
    if isinstance(r, Err):
        return Ok(f(r.error))
    return r


def flatten[T, E](r: Result[Result[T, E], E]) -> Result[T, E]:
    # Ok(Ok(v)) -> Ok(v)
    # Ok(Err(e))-> Err(e)
    # Err(e)    -> Err(e)
    if isinstance(r, Ok):
        return r.value
    return r


# ---------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------


def unwrap[T](r: Ok[T]) -> T:
    """Return the value of a Result already narrowed to Ok."""
    return r.value


def unwrap_err[E](r: Err[E]) -> E:
    """Return the error of a Result already narrowed to Err."""
    return r.error


def get_or_else[T, E](r: Result[T, E], default: T) -> T:
    """Return the value if Ok, else default."""
    return r.unwrap_or(default)


def get_or_else_lazy[T, E](r: Result[T, E], f: Callable[[E], T]) -> T:
    """Return the value if Ok, else compute a default from the error."""
    return r.value if isinstance(r, Ok) else f(r.error)


def get_or_none[T, E](r: Result[T, E]) -> T | None:
    """Return the value if Ok, else None."""
    return r.value if isinstance(r, Ok) else None


def get_or_raise[T, E](r: Result[T, E], on_error: Callable[[E], BaseException] | None = None) -> T:
    """Return the value if Ok, else raise.

    Args:
        r: The Result to extract from.
        on_error: Builds the exception to raise from the error payload.

    Returns:
        T: The contained value.

    Raises:
        BaseException: ``on_error(error)`` when given; the error itself when it
            is an exception; otherwise UnwrapError.
    """
    if isinstance(r, Ok):
        return r.value
    log_raise("result.get_or_raise", r)
    if on_error is not None:
        raise on_error(r.error)
    if isinstance(r.error, BaseException):
        raise r.error
    raise UnwrapError(r, f"Result is Err({r.error!r})")


# ---------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------


def zip[T, U, E](a: Result[T, E], b: Result[U, E]) -> Result[tuple[T, U], E]:
    """Ok((a, b)) if both are Ok, else the first Err (a before b)."""
    if isinstance(a, Err):
        return a
    if isinstance(b, Err):
        return b
    return Ok((a.value, b.value))


def apply[T, U, E](fn: Result[Callable[[T], U], E], arg: Result[T, E]) -> Result[U, E]:
    """Apply a wrapped function to a wrapped argument, short-circuiting left to right."""
    if isinstance(fn, Err):
        return fn
    if isinstance(arg, Err):
        return arg
    return Ok(fn.value(arg.value))


def or_else[T, E](r: Result[T, E], other: Result[T, E]) -> Result[T, E]:
    """Return r if Ok, else other unchanged."""
    return r.or_else(other)


def collect[T, E](rs: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect values from an iterable of Results, short-circuiting on first Err.

    Args:
        rs: An iterable of Result instances.

    Returns:
        Result[list[T], E]: Ok with list of values if all Ok, otherwise first Err encountered.
    """
    out: list[T] = []
    for r in rs:
        if isinstance(r, Ok):
            out.append(r.value)
        else:
            return r
    return Ok(out)


def partition[T, E](rs: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate an iterable of Results into successes and failures.

    Returns:
        tuple[list[T], list[E]]: A tuple of (successful_values, errors).
    """
    oks: list[T] = []
    errs: list[E] = []
    for r in rs:
        if isinstance(r, Ok):
            oks.append(r.value)
        else:
            errs.append(r.error)
    return oks, errs


def to_option[T, E](r: Result[T, E]) -> Option[T]:
    """Some(value) if Ok, else Nothing."""
    from adtkit.option import Nothing, Some

    return Some(r.value) if isinstance(r, Ok) else Nothing
