"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import Dict, List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Maintains a list of shutdown handlers and executes them in priority order
    when shutdown is triggered (signal, or the watched run loop finishing).

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(RunLoopShutdownHandler(run_loop))
        coordinator.register(BlackoutShutdownHandler(renderer))

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown(run_task)
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Initialize shutdown coordinator.

        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List[IShutdownHandler] = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler: IShutdownHandler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method

        Raises:
            ValueError: Handler does not implement the protocol
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install OS signal handlers for graceful shutdown.

        Registers SIGINT (Ctrl+C) and SIGTERM.
        """
        self._ensure_event()

        def signal_handler(sig: signal.Signals) -> None:
            log.info(f"Signal {sig.name} received → triggering shutdown")
            self.trigger(sig.name)

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def _ensure_event(self) -> asyncio.Event:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        return self._shutdown_event

    def trigger(self, reason: str) -> None:
        """Request shutdown (first reason wins)."""
        if self._shutdown_trigger["reason"] is None:
            self._shutdown_trigger["reason"] = reason
        self._ensure_event().set()

    async def wait_for_shutdown(self, watched: Optional[asyncio.Task] = None) -> None:
        """
        Wait for a shutdown request, or for the watched task to finish.

        Args:
            watched: Main task (run loop); its completion also ends the wait
        """
        event = self._ensure_event()
        if watched is None:
            await event.wait()
            return

        waiter = asyncio.create_task(event.wait())
        try:
            done, _ = await asyncio.wait({waiter, watched}, return_when=asyncio.FIRST_COMPLETED)
            if watched in done and not event.is_set():
                if watched.cancelled() or watched.exception() is None:
                    self.trigger("Run loop finished")
                else:
                    self.trigger(f"Run loop failed: {watched.exception()}")
        finally:
            if not waiter.done():
                waiter.cancel()

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers are called in descending priority order (highest first).
        A failing or slow handler is logged and skipped; the rest still run.
        """
        log.info("🛑 Initiating graceful shutdown sequence...")
        log.info(f"   Reason: {self.reason or 'UNKNOWN'}")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(
                    f"⚠️  Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)"
                )
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"✓ {handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"⚠️  {handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except Exception as e:
                log.error(f"❌ Error shutting down {handler_name}", error=str(e), error_type=type(e).__name__)

        log.info("✓ Shutdown sequence complete")

    def get_handler(self, handler_type: type):
        """Get a registered handler by type (None if not registered)."""
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None
