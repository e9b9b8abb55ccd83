"""@safe and @safe_async: turn raising callables into Result-returning ones.

Both decorators run the call through the same capture boundary as
``result.from_throwable`` / ``result.from_awaitable``, so captured exceptions
are logged the same way. Unlike those constructors they accept an
``exceptions`` tuple to narrow what is captured; anything else propagates.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from adtkit._capture import CAPTURED
from adtkit.result import Result, _await_capturing, _call_capturing

__all__ = ["safe", "safe_async"]


def _source(prefix: str, wrapped: Any) -> str:
    return f"{prefix}:{getattr(wrapped, '__qualname__', wrapped)}"


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T, X: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[X], ...],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, X]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Wrap a function so it returns Ok(value) or Err(exception).

    Usable bare or with arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to ``Exception``.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    captured = CAPTURED if exceptions is None else exceptions

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return _call_capturing(lambda: wrapped(*args, **kwargs), captured, _source("safe", wrapped))

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[**P, T, X: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[X], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, X]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async counterpart of ``safe`` for coroutine functions.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to ``Exception``.
    """
    captured = CAPTURED if exceptions is None else exceptions

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return await _await_capturing(wrapped(*args, **kwargs), captured, _source("safe_async", wrapped))

    if func is not None:
        return wrapper(func)
    return wrapper
