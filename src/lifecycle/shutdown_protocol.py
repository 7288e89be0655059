"""
Shutdown handler protocol for component-based graceful shutdown.

Each component that needs cleanup implements IShutdownHandler to participate
in the graceful shutdown sequence.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need graceful shutdown.

    The ShutdownCoordinator calls shutdown() on each handler in priority order.

    Example:
        class BlackoutShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 100

            async def shutdown(self) -> None:
                self.renderer.blackout()
    """

    @property
    def shutdown_priority(self) -> int:
        """
        Higher priority shuts down earlier.
        """
        ...

    async def shutdown(self) -> None:
        """
        Called during coordinated shutdown.
        """
        ...
