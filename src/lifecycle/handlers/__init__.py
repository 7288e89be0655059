from .blackout_shutdown_handler import BlackoutShutdownHandler
from .run_loop_shutdown_handler import RunLoopShutdownHandler

__all__ = [
    "BlackoutShutdownHandler",
    "RunLoopShutdownHandler",
]
