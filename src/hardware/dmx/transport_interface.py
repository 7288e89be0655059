# hardware/dmx/transport_interface.py
"""
IDmxTransport Protocol
======================
Hardware abstraction for DMX output.
Minimal contract for any transport (OLA, virtual, ...).
"""

from __future__ import annotations
from typing import Protocol, Sequence


class IDmxTransport(Protocol):
    """
    Protocol defining minimal DMX output interface.

    All implementations must provide:
    - send: push one universe's channel values (1-512 channels, 0-255 each)
    """

    def send(self, universe: int, channels: Sequence[int]) -> None:
        """
        Transmit channel values for one universe.
        Channel 1 is channels[0]. May raise on transport failure.
        """
        ...
