from __future__ import annotations

import asyncio
from typing import Callable

DEFAULT_QUIET_PERIOD = 0.3


class SearchDebouncer:
    """
    Turns raw search edits into effective queries.

    - A value is delivered only after ``quiet_period`` seconds without a newer edit
    - A value equal to the last delivered one is suppressed

    Timers run on the event loop that calls ``push()``; ``on_query`` is
    invoked on that same loop.
    """

    def __init__(
        self,
        on_query: Callable[[str], None],
        quiet_period: float = DEFAULT_QUIET_PERIOD,
    ) -> None:
        self._on_query = on_query
        self._quiet_period = quiet_period
        self._pending: asyncio.TimerHandle | None = None
        self._has_emitted = False
        self._last_emitted = ""

    def push(self, raw_query: str) -> None:
        """Record a keystroke; restarts the quiet period."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._pending = loop.call_later(self._quiet_period, self._emit, raw_query)

    def cancel(self) -> None:
        """Drop the pending emission, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _emit(self, query: str) -> None:
        self._pending = None
        if self._has_emitted and query == self._last_emitted:
            return

        self._has_emitted = True
        self._last_emitted = query
        self._on_query(query)
