"""
Utility functions for the flicker engine
"""

from .colors import (
    kelvin_to_rgb,
    hex_to_rgb,
    rgb_to_hex,
    scale_rgb,
    gamma_correct,
)

__all__ = [
    'kelvin_to_rgb',
    'hex_to_rgb',
    'rgb_to_hex',
    'scale_rgb',
    'gamma_correct',
]
