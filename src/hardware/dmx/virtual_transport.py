from __future__ import annotations
from typing import Dict, List, Sequence

from hardware.dmx.transport_interface import IDmxTransport


class VirtualTransport(IDmxTransport):

    def __init__(self) -> None:
        self.frames: Dict[int, List[int]] = {}
        self.frames_sent = 0

    def send(self, universe: int, channels: Sequence[int]) -> None:
        self.frames[universe] = list(channels)
        self.frames_sent += 1

    def last_frame(self, universe: int) -> List[int]:
        return self.frames.get(universe, [])

