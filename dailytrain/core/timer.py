"""Countdown tick sources for the session engine."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol


logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]
CancelTicking = Callable[[], None]


class Ticker(Protocol):
    def start(self, callback: TickCallback) -> CancelTicking:
        """Start calling ``callback`` once per interval; return its cancel handle."""
        ...


class AsyncioTicker:
    """Recurring callback on the running asyncio loop.

    Deadlines are absolute (``start + n * interval``) so a slow callback does
    not push later ticks back.
    """

    def __init__(
        self,
        interval_sec: float = 1.0,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval_sec <= 0:
            raise ValueError("Tick interval must be > 0")
        self._interval_sec = interval_sec
        self._loop = loop

    @property
    def interval_sec(self) -> float:
        return self._interval_sec

    def start(self, callback: TickCallback) -> CancelTicking:
        loop = self._loop or asyncio.get_running_loop()
        interval = self._interval_sec
        origin = loop.time()
        count = 0
        cancelled = False
        handle: Optional[asyncio.TimerHandle] = None

        def _fire() -> None:
            nonlocal count, handle
            if cancelled:
                return
            count += 1
            handle = loop.call_at(origin + (count + 1) * interval, _fire)
            callback()

        def _cancel() -> None:
            nonlocal cancelled
            cancelled = True
            if handle is not None:
                handle.cancel()

        handle = loop.call_at(origin + interval, _fire)
        return _cancel


class CountdownTimer:
    """Owns at most one live tick source."""

    def __init__(self, ticker: Ticker) -> None:
        self._ticker = ticker
        self._cancel: CancelTicking | None = None

    @property
    def active(self) -> bool:
        return self._cancel is not None

    def start(self, callback: TickCallback) -> None:
        self.stop()
        self._cancel = self._ticker.start(callback)
        logger.debug("Countdown started")

    def stop(self) -> None:
        cancel = self._cancel
        if cancel is None:
            return
        self._cancel = None
        cancel()
        logger.debug("Countdown stopped")
