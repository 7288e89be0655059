"""
DmxRenderer - Zone-aware DMX frame assembly
===========================================
Domain layer: lays the engine's flat color buffer out onto universes.

Responsibilities:
- Zone -> universe mapping (via ZoneLayout)
- Head/tail padding as dark fixtures
- 3 channels (R, G, B) per fixture
- Transport error isolation (a failed send never stops the animation)

Does NOT:
- Encode the DMX wire protocol (delegated to the transport / olad)
"""

from __future__ import annotations
from typing import Dict, List, Sequence

from hardware.dmx.transport_interface import IDmxTransport
from models.color import Color
from models.zone import ZoneLayout
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.RENDER)

_DARK_PIXEL = (0, 0, 0)


class DmxRenderer:
    """
    Buffer -> per-universe channel frames -> transport.

    Zones sharing a universe are packed back to back in layout order,
    each as head padding + body + tail padding.

    Usage:
        renderer = DmxRenderer(layout, transport)
        renderer.render(engine.tick())
    """

    def __init__(self, layout: ZoneLayout, transport: IDmxTransport) -> None:
        self.layout = layout
        self.transport = transport
        self.frames_rendered = 0
        self.send_failures = 0

        log.info(
            "DmxRenderer initialized",
            zones=len(layout),
            universes=layout.universes,
            transport=type(transport).__name__,
        )

    def build_frames(self, buffer: Sequence[Color]) -> Dict[int, List[int]]:
        """
        Lay out a color buffer onto universes

        Args:
            buffer: One color per animated pixel (layout.pixel_count long)

        Returns:
            {universe: [ch1, ch2, ...]}

        Raises:
            ValueError: Buffer length does not match the layout
        """
        if len(buffer) != self.layout.pixel_count:
            raise ValueError(f"Buffer has {len(buffer)} pixels, layout expects {self.layout.pixel_count}")

        frames: Dict[int, List[int]] = {u: [] for u in self.layout.universes}
        for span in self.layout:
            zone = span.zone
            channels = frames[zone.universe]
            channels.extend(_DARK_PIXEL * zone.head)
            for color in buffer[span.to_slice()]:
                channels.extend(color.to_rgb())
            channels.extend(_DARK_PIXEL * zone.tail)
        return frames

    def render(self, buffer: Sequence[Color]) -> None:
        """Send one buffer to every universe; failures are logged per universe"""
        for universe, channels in self.build_frames(buffer).items():
            try:
                self.transport.send(universe, channels)
            except Exception as ex:
                self.send_failures += 1
                log.error("Frame send failed", universe=universe, error=str(ex), failures=self.send_failures)
        self.frames_rendered += 1

    def blackout(self) -> None:
        """Render an all-dark frame to every universe of the layout"""
        self.render([Color.black()] * self.layout.pixel_count)
        log.info("Blackout sent", universes=self.layout.universes)
