"""
Color model - RGB triple handed to the renderer

Keeps the color temperature it was derived from (if any) so dimmed
variants can be traced back to their source when logging.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from utils.colors import (
    gamma_correct,
    hex_to_rgb,
    kelvin_to_rgb,
    rgb_to_hex,
    scale_rgb,
)


@dataclass(frozen=True)
class Color:
    """
    Immutable 8-bit RGB color

    Examples:
        warm = Color.from_kelvin(2700)
        dimmed = warm.with_intensity(0.25, ceiling=0.8)
        r, g, b = dimmed.to_rgb()
    """

    r: int = 0
    g: int = 0
    b: int = 0
    kelvin: Optional[int] = field(default=None, compare=False)

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r=int(r), g=int(g), b=int(b))

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Create from RRGGBB hex string

        Raises:
            ValueError: If the string is not six hex digits
        """
        return cls.from_rgb(*hex_to_rgb(value))

    @classmethod
    def from_kelvin(cls, kelvin: int) -> 'Color':
        r, g, b = kelvin_to_rgb(kelvin)
        return cls(r=r, g=g, b=b, kelvin=int(kelvin))

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    @property
    def channel_sum(self) -> int:
        return self.r + self.g + self.b

    # === ADJUSTMENTS ===

    def with_intensity(self, intensity: float, ceiling: float = 1.0) -> 'Color':
        """
        Return dimmed copy (keeps kelvin reference)

        Args:
            intensity: Brightness fraction, clamped to 0..ceiling
            ceiling: Maximum brightness fraction
        """
        r, g, b = scale_rgb(self.to_rgb(), intensity, ceiling)
        return Color(r=r, g=g, b=b, kelvin=self.kelvin)

    def gamma_corrected(self) -> 'Color':
        r, g, b = gamma_correct(self.to_rgb())
        return Color(r=r, g=g, b=b, kelvin=self.kelvin)

    @staticmethod
    def black() -> 'Color':
        return _BLACK

    # === STRING REPRESENTATION ===

    def __str__(self) -> str:
        if self.kelvin is not None:
            return f"Color(RGB={self.to_rgb()}, {self.kelvin}K)"
        return f"Color(RGB={self.to_rgb()})"

    def __repr__(self) -> str:
        return self.__str__()


_BLACK = Color()
