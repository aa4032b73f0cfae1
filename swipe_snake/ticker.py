"""Fixed-period tick timer running on the asyncio event loop."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """Calls ``callback`` once per period until stopped.

    ``stop`` may be called from inside the callback: the loop that is
    running simply exits after the callback returns instead of being
    cancelled mid-tick.
    """

    def __init__(self, callback: Callable[[], Awaitable[None]]):
        self._callback = callback
        self._task: Optional[asyncio.Task] = None
        self._generation = 0
        self.period_ms: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self, period_ms: int):
        self.stop()
        self.period_ms = period_ms
        self._task = asyncio.get_running_loop().create_task(self._run(self._generation))

    def set_period(self, period_ms: int):
        self.period_ms = period_ms

    def stop(self):
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()

    async def _run(self, generation: int):
        while generation == self._generation:
            await asyncio.sleep(self.period_ms / 1000)
            if generation != self._generation:
                break
            try:
                await self._callback()
            except Exception:
                logger.exception("Tick callback failed, stopping ticker")
                if generation == self._generation:
                    self.stop()
                return
