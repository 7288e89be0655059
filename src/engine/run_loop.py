"""
RunLoop: fixed-interval driver for the animation engine.

Each iteration:
  1. engine.tick()        (advance every pixel once)
  2. renderer.render()    (hand the buffer to the DMX transport)
  3. deadline check       (stop once run_for has elapsed)
  4. sleep(interval)      (cut short by stop())

A tick always completes; the deadline and stop requests are only
honoured between ticks.
"""

from __future__ import annotations
import asyncio
import time
from typing import Callable, Optional

from animations.engine import AnimationEngine
from hardware.dmx.renderer import DmxRenderer
from models.config import RunConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

# Seconds between lit-pixel statistics lines
STATS_PERIOD_S = 10.0


class RunLoop:
    """
    Drives AnimationEngine -> DmxRenderer until the run deadline.

    Single task, no locks: the engine and renderer are only touched from
    run(). stop() may be called from a signal handler or shutdown handler.
    """

    def __init__(
        self,
        engine: AnimationEngine,
        renderer: DmxRenderer,
        run_config: RunConfig,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.engine = engine
        self.renderer = renderer
        self.run_config = run_config
        self._clock = clock

        self.running = False
        self.ticks = 0
        self._stop_event: Optional[asyncio.Event] = None

        interval_s = run_config.interval.total_seconds()
        self._stats_every = max(1, int(STATS_PERIOD_S / interval_s))

    async def run(self) -> int:
        """
        Run until the deadline passes or stop() is called.

        Returns:
            Number of ticks executed
        """
        self._stop_event = asyncio.Event()
        self.running = True

        interval_s = self.run_config.interval.total_seconds()
        run_for_s = self.run_config.run_for.total_seconds()
        start = self._clock()

        log.info(
            "Run loop started",
            interval=f"{interval_s:.3f}s",
            run_for=str(self.run_config.run_for),
        )

        try:
            while True:
                buffer = self.engine.tick()
                self.renderer.render(buffer)
                self.ticks += 1

                if self.ticks % self._stats_every == 0:
                    log.debug(
                        "Animation stats",
                        tick=self.ticks,
                        lit=f"{self.engine.lit_count}/{self.engine.pixel_count}",
                        send_failures=self.renderer.send_failures,
                    )

                if self._clock() - start > run_for_s:
                    log.info("Run duration reached", ticks=self.ticks)
                    break
                if not self.running:
                    break

                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=interval_s)
                except asyncio.TimeoutError:
                    pass
                if not self.running:
                    break
        finally:
            self.running = False

        log.info("Run loop finished", ticks=self.ticks)
        return self.ticks

    def stop(self) -> None:
        """Request the loop to end after the current tick."""
        self.running = False
        if self._stop_event is not None:
            self._stop_event.set()
