"""
Models package - Data models for the flicker engine
"""

from .enums import AnimationModel, ColorSourceKind, TransportKind, PixelTransition, LogLevel, LogCategory
from .color import Color
from .pixel import Pixel
from .zone import Zone, ZoneLayout

__all__ = [
    'AnimationModel',
    'ColorSourceKind',
    'TransportKind',
    'PixelTransition',
    'LogLevel',
    'LogCategory',
    'Color',
    'Pixel',
    'Zone',
    'ZoneLayout',
]
