from __future__ import annotations

from hardware.dmx.renderer import DmxRenderer
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class BlackoutShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for DMX output.

    Sends an all-dark frame to every universe so fixtures are not left lit.
    Runs AFTER the run loop stops, otherwise the next tick would relight them.

    Priority: 100 (runs second, after the run loop stops)
    """

    def __init__(self, renderer: DmxRenderer):
        self.renderer = renderer

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Blacking out all universes...")
        self.renderer.blackout()
