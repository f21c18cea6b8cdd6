"""Application search – per-field debounced input.

Each text field gets its own :class:`DebouncedInput`; a pending timer on one
field never delays another field or a checkbox click.  Only the committed
value (the last one pushed before a quiet period) reaches the callback.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

from expert_directory.observability.logging import get_logger

T = TypeVar("T")

Commit = Callable[[T], Awaitable[object]]

logger = get_logger(__name__)


class DebouncedInput(Generic[T]):
    def __init__(self, delay: float, on_commit: Commit[T]) -> None:
        self._delay = delay
        self._on_commit = on_commit
        self._timer: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._value: T | None = None

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def value(self) -> T | None:
        """Value pushed but not committed yet, if any."""
        return self._value

    def push(self, value: T) -> None:
        """Record a keystroke; restarts the quiet-period timer."""
        self.cancel()
        self._value = value
        task = asyncio.ensure_future(self._commit_later(value))
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        self._timer = task

    def _finished(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("debounced_commit_failed", error=repr(exc))

    async def _commit_later(self, value: T) -> None:
        await asyncio.sleep(self._delay)
        # quiet period over: later pushes no longer cancel this commit
        self._timer = None
        self._value = None
        await self._on_commit(value)

    async def flush(self) -> None:
        """Commit the pending value now instead of waiting for the timer."""
        if not self.pending:
            return
        value = self._value
        self.cancel()
        await self._on_commit(value)  # type: ignore[arg-type]

    async def wait(self) -> None:
        """Wait until every started commit has run."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def cancel(self) -> None:
        """Drop the uncommitted value; commits already running are left alone."""
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None
        self._value = None


__all__ = ["DebouncedInput"]
