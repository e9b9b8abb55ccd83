"""Awaitable conversions.

Free functions turn the eventual outcome of any awaitable into an ADT value
without touching built-in types:

    ```python
    from adtkit import aio

    r = await aio.to_result(fetch(url), lambda e: str(e))
    o = await aio.to_option(cache.get(key))
    ```

Cancellation is never captured: awaiting a cancelled task still raises.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from adtkit import either, maybe, option, result
from adtkit.either import Either
from adtkit.maybe import Maybe
from adtkit.option import Option
from adtkit.result import Result

__all__ = [
    "to_either",
    "to_maybe",
    "to_option",
    "to_result",
]


async def to_option[T](awaitable: Awaitable[T]) -> Option[T]:
    """Some on fulfilment, Nothing on a captured exception."""
    return await option.from_awaitable(awaitable)


async def to_maybe[T](awaitable: Awaitable[T]) -> Maybe[T]:
    """The value on fulfilment, None on a captured exception."""
    return await maybe.from_awaitable(awaitable)


async def to_either[A, B](
    awaitable: Awaitable[B],
    on_error: Callable[[Exception], A] | None = None,
) -> Either[A, B]:
    """Right on fulfilment, Left(on_error(exc)) on a captured exception."""
    return await either.from_awaitable(awaitable, on_error)


async def to_result[T, E](
    awaitable: Awaitable[T],
    on_error: Callable[[Exception], E] | None = None,
) -> Result[T, E]:
    """Ok on fulfilment, Err(on_error(exc)) on a captured exception."""
    return await result.from_awaitable(awaitable, on_error)
