# hardware/dmx/ola_transport.py
"""
OlaTransport - Open Lighting Architecture output
=================================================
Concrete implementation of IDmxTransport on top of the `ola_set_dmx`
command line client. OLA (olad) owns the wire protocol and the patching
of universes to physical ports or sACN/Art-Net outputs.

Features:
- One subprocess call per universe frame
- Frames padded/truncated to the configured universe size
- Channel values clamped to 0-255
"""

from __future__ import annotations
import subprocess
from dataclasses import dataclass
from typing import Sequence

from hardware.dmx.transport_interface import IDmxTransport
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class TransportError(RuntimeError):
    """DMX frame could not be delivered."""


@dataclass(frozen=True)
class OlaConfig:
    """Configuration for the OLA command line transport."""
    executable: str = "ola_set_dmx"
    timeout_s: float = 0.5
    universe_size: int = 512


class OlaTransport(IDmxTransport):
    """
    DMX output through olad.

    - send() raises TransportError when ola_set_dmx fails; the renderer
      decides whether that is fatal
    - send() blocks the calling thread, and so the run loop's event loop,
      for up to timeout_s per universe; signals are handled between frames
    """

    def __init__(self, config: OlaConfig = OlaConfig()) -> None:
        self.config = config

        log.info(
            "OlaTransport initialized",
            executable=config.executable,
            timeout=f"{config.timeout_s}s",
        )

    # ==================== IDmxTransport API ====================

    def send(self, universe: int, channels: Sequence[int]) -> None:
        size = self.config.universe_size
        frame = [max(0, min(255, int(v))) for v in channels[:size]]

        data_str = ",".join(str(v) for v in frame)
        try:
            result = subprocess.run(
                [self.config.executable, "-u", str(universe), "-d", data_str],
                capture_output=True,
                text=True,
                timeout=self.config.timeout_s,
            )
        except (OSError, subprocess.TimeoutExpired) as ex:
            raise TransportError(f"ola_set_dmx failed for universe {universe}: {ex}") from ex

        if result.returncode != 0:
            raise TransportError(
                f"ola_set_dmx exited {result.returncode} for universe {universe}: {result.stderr.strip()}"
            )

