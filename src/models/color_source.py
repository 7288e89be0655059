"""
Color sources - ranges a pixel samples its color from at ignition

Two kinds:
- TemperatureRange: uniform Kelvin sample, then converted to RGB
- RGBRange: per-channel uniform sample between two hex colors
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Union

from models.color import Color
from models.enums import ColorSourceKind
from utils.colors import MAX_KELVIN, MIN_KELVIN


@dataclass(frozen=True)
class TemperatureRange:
    """
    Color temperature range in Kelvin (bounds in any order)

    Example:
        TemperatureRange(2700, 5500).pick(rng)  # somewhere between warm and cool white
    """
    low: int
    high: int

    def __post_init__(self):
        for bound in (self.low, self.high):
            if not MIN_KELVIN <= bound <= MAX_KELVIN:
                raise ValueError(f"Color temperature {bound}K outside {MIN_KELVIN}-{MAX_KELVIN}K")

    @property
    def kind(self) -> ColorSourceKind:
        return ColorSourceKind.TEMPERATURE

    def pick(self, rng: random.Random) -> Color:
        lo, hi = sorted((self.low, self.high))
        kelvin = int(round(lo + rng.random() * (hi - lo)))
        return Color.from_kelvin(kelvin)

    def __str__(self) -> str:
        return f"{self.low}K:{self.high}K"


@dataclass(frozen=True)
class RGBRange:
    """
    RGB range; each channel sampled independently between the bounds

    Example:
        RGBRange(Color.from_hex("FF2000"), Color.from_hex("FF8000")).pick(rng)
    """
    low: Color
    high: Color

    @property
    def kind(self) -> ColorSourceKind:
        return ColorSourceKind.RGB

    @staticmethod
    def _channel_in_range(a: int, b: int, rng: random.Random) -> int:
        lo, hi = sorted((a, b))
        return int(round(lo + rng.random() * (hi - lo)))

    def pick(self, rng: random.Random) -> Color:
        return Color.from_rgb(
            self._channel_in_range(self.low.r, self.high.r, rng),
            self._channel_in_range(self.low.g, self.high.g, rng),
            self._channel_in_range(self.low.b, self.high.b, rng),
        )

    def __str__(self) -> str:
        return f"{self.low.to_hex()}:{self.high.to_hex()}"


ColorSource = Union[TemperatureRange, RGBRange]


def parse_temperature_range(text: str) -> TemperatureRange:
    """
    Parse "LOW:HIGH" Kelvin range (e.g. "2700:5500")

    Raises:
        ValueError: On missing separator, non-numeric or out-of-range bounds
    """
    tokens = text.split(":")
    if len(tokens) != 2:
        raise ValueError(f"Temperature range must be LOW:HIGH, got {text!r}")
    try:
        low, high = (int(t.strip()) for t in tokens)
    except ValueError:
        raise ValueError(f"Temperature range bounds must be integers, got {text!r}") from None
    return TemperatureRange(low, high)


def parse_rgb_range(text: str) -> RGBRange:
    """
    Parse "RRGGBB:RRGGBB" hex range

    Raises:
        ValueError: On missing separator or malformed hex
    """
    tokens = text.split(":")
    if len(tokens) != 2:
        raise ValueError(f"RGB range must be RRGGBB:RRGGBB, got {text!r}")
    return RGBRange(Color.from_hex(tokens[0]), Color.from_hex(tokens[1]))
