from __future__ import annotations

from engine.run_loop import RunLoop
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class RunLoopShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the animation run loop.
    Stops ticking before the outputs are blacked out.
    """

    def __init__(self, run_loop: RunLoop):
        self.run_loop = run_loop

    @property
    def shutdown_priority(self) -> int:
        return 130  # FIRST

    async def shutdown(self) -> None:
        if self.run_loop.running:
            log.info("Stopping run loop...")
        self.run_loop.stop()
