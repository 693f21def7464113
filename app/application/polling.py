"""Interval polling with an overlap guard for dashboard style data feeds.

Clients that refresh a value on a timer, such as the notification delivery
counts served by ``GET /api/notifications/logs/counts``, wrap the fetch in a
:class:`PollingTask`::

    counts = PollingTask(fetch_counts, interval=30, key=user_id, default={})
    counts.start()
    ...
    await counts.set_key(other_user_id)
    await counts.stop()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from anyio import to_thread

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchCallable = Callable[[Any], Any]


class PollingTask(Generic[T]):
    """Fetch a value on start and then every ``interval`` seconds.

    ``fetch`` receives the current key and may be a coroutine function or a
    plain callable; plain callables run in a worker thread. The last fetched
    value is exposed as :attr:`value`. Fetch errors are logged and reset the
    value to ``default``. Only one fetch runs at a time: a tick that arrives
    while another fetch is in flight is skipped.
    """

    def __init__(
        self,
        fetch: FetchCallable,
        *,
        interval: float = 30.0,
        default: T | None = None,
        key: Any = None,
        name: str | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._fetch = fetch
        self.interval = interval
        self.default = default
        self.name = name or getattr(fetch, "__name__", "polling-task")
        self._key = key
        self._value: T | None = default
        self._in_flight = False
        self._task: asyncio.Task[None] | None = None
        self.last_error: BaseException | None = None

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def key(self) -> Any:
        return self._key

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def _call_fetch(self, key: Any) -> T:
        if inspect.iscoroutinefunction(self._fetch):
            return await self._fetch(key)
        result = await to_thread.run_sync(self._fetch, key)
        if inspect.isawaitable(result):
            return await result
        return result

    async def tick(self) -> bool:
        """Run one fetch. Returns ``False`` when skipped by the overlap guard."""

        if self._in_flight:
            logger.debug("Polling task %s skipped a tick; fetch in flight", self.name)
            return False

        self._in_flight = True
        try:
            while True:
                key = self._key
                try:
                    result = await self._call_fetch(key)
                except Exception as exc:
                    logger.exception("Polling task %s fetch failed", self.name)
                    self.last_error = exc
                    result = self.default
                else:
                    self.last_error = None
                if key == self._key:
                    self._value = result
                    return True
                logger.debug(
                    "Polling task %s key changed during fetch; refetching", self.name
                )
        finally:
            self._in_flight = False

    async def _run(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        """Start polling on the running event loop. A second call is a no-op."""

        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name=f"polling:{self.name}"
        )
        logger.info("Started polling task %s every %.1fs", self.name, self.interval)

    async def stop(self) -> None:
        """Cancel the polling loop. Safe to call when already stopped."""

        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Stopped polling task %s", self.name)

    async def set_key(self, key: Any) -> None:
        """Switch to ``key``, resetting the value and fetching again if it changed."""

        if key == self._key:
            return
        self._key = key
        self._value = self.default
        await self.tick()


__all__ = ["PollingTask"]
