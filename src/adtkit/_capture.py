"""Shared plumbing for the raise-to-data boundaries."""

from __future__ import annotations

from adtkit._logging import get_logger

__all__ = ["CAPTURED", "log_capture", "log_raise"]

# BaseException subclasses (KeyboardInterrupt, cancellation) are never captured.
CAPTURED: tuple[type[Exception], ...] = (Exception,)


def log_capture(source: str, exc: BaseException) -> None:
    get_logger(__name__).debug(
        "captured exception",
        source=source,
        exception_type=type(exc).__name__,
        detail=str(exc),
    )


def log_raise(source: str, container: object) -> None:
    get_logger(__name__).debug("raising from failure container", source=source, container=repr(container))
