"""Error raised when a failure container is forced into raise-based code."""

from __future__ import annotations

from typing import Any

__all__ = ["UnwrapError"]


class UnwrapError(RuntimeError):
    """A value was extracted from a failure/absence container.

    Raised by ``get_or_raise`` when no converter was supplied and the failure
    payload is not itself an exception, and by the ``unwrap`` methods of the
    failure variants.

    Attributes:
        container: The container that could not be unwrapped.
    """

    def __init__(self, container: Any, message: str | None = None) -> None:
        self.container = container
        super().__init__(message or f"Called unwrap on {container!r}")
