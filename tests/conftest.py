from __future__ import annotations

from typing import Callable

import pytest


class ManualTicker:
    """Tick source driven by the test instead of a clock."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self._token = 0
        self.starts = 0
        self.cancels = 0

    @property
    def live(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> Callable[[], None]:
        assert self._callback is None, "a second tick source was started"
        self._token += 1
        token = self._token
        self._callback = callback
        self.starts += 1

        def _cancel() -> None:
            if self._token == token and self._callback is not None:
                self._callback = None
                self.cancels += 1

        return _cancel

    def tick(self, count: int = 1) -> None:
        for _ in range(count):
            if self._callback is None:
                return
            self._callback()


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()
