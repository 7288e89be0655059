"""
Color conversion utilities

Pure functions for color temperature, hex parsing, intensity scaling and
gamma correction. All values are 8-bit (0-255) RGB tuples.
"""

import math
from typing import Tuple

RGBTuple = Tuple[int, int, int]

MIN_KELVIN = 1000
MAX_KELVIN = 40000

GAMMA = 2.8


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def kelvin_to_rgb(kelvin: float) -> RGBTuple:
    """
    Convert color temperature (Kelvin) to RGB (0-255)

    Tanner Helland's curve fit of the blackbody locus. Input is clamped
    to 1000-40000 K where the approximation holds.

    Args:
        kelvin: Color temperature in Kelvin

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        kelvin_to_rgb(2700)   # (255, 167, 87)  warm white
        kelvin_to_rgb(6600)   # (255, 255, 255) daylight
    """
    k = max(MIN_KELVIN, min(MAX_KELVIN, kelvin)) / 100.0

    if k <= 66:
        r = 255.0
        g = 99.4708025861 * math.log(k) - 161.1195681661
    else:
        r = 329.698727446 * ((k - 60) ** -0.1332047592)
        g = 288.1221695283 * ((k - 60) ** -0.0755148492)

    if k >= 66:
        b = 255.0
    elif k <= 19:
        b = 0.0
    else:
        b = 138.5177312231 * math.log(k - 10) - 305.0447927307

    return (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def hex_to_rgb(value: str) -> RGBTuple:
    """
    Parse RRGGBB (optional leading '#') to RGB

    Raises:
        ValueError: If the string is not six hex digits
    """
    text = value.strip().lstrip('#')
    if len(text) != 6:
        raise ValueError(f"Expected RRGGBB, got {value!r}")
    return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"{r:02X}{g:02X}{b:02X}"


def scale_rgb(rgb: RGBTuple, intensity: float, ceiling: float = 1.0) -> RGBTuple:
    """
    Dim an RGB color by intensity, never brighter than ceiling

    Args:
        rgb: Full-brightness color
        intensity: Brightness fraction (clamped to 0..ceiling)
        ceiling: Maximum brightness fraction

    Returns:
        Scaled (r, g, b), rounded to the nearest channel value
    """
    factor = max(0.0, min(intensity, ceiling))
    r, g, b = rgb
    return (_clamp_channel(r * factor), _clamp_channel(g * factor), _clamp_channel(b * factor))


def _build_gamma_table(gamma: float = GAMMA) -> Tuple[int, ...]:
    return tuple(int(round(255 * ((i / 255.0) ** gamma))) for i in range(256))


GAMMA_TABLE = _build_gamma_table()


def gamma_correct(rgb: RGBTuple) -> RGBTuple:
    """
    Perceptual gamma correction through an 8-bit lookup table

    Example:
        gamma_correct((255, 128, 0))  # (255, 37, 0)
    """
    r, g, b = rgb
    return (GAMMA_TABLE[r], GAMMA_TABLE[g], GAMMA_TABLE[b])
