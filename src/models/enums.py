"""
Enums for the flicker animation
"""

from enum import Enum, auto


class AnimationModel(Enum):
    """
    Per-pixel transition policies

    LOGNORMAL: Age-driven decay along a log-normal curve (default)
    DRIFT: Continuous intensity with stochastic rise/fall
    """
    LOGNORMAL = auto()
    DRIFT = auto()


class ColorSourceKind(Enum):
    """Color source range types"""
    TEMPERATURE = auto()   # Kelvin range, converted to RGB after sampling
    RGB = auto()           # Per-channel hex range


class TransportKind(Enum):
    """DMX transport selection"""
    AUTO = auto()      # OLA if available, virtual otherwise
    VIRTUAL = auto()   # In-memory, no hardware
    OLA = auto()       # Open Lighting Architecture (ola_set_dmx)


class PixelTransition(Enum):
    """What happened to a pixel during one tick"""
    IDLE = auto()          # Dark and stayed dark
    IGNITED = auto()
    RISING = auto()
    FALLING = auto()
    EXTINGUISHED = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # DMX transports
    ANIMATION = auto()   # Pixel transitions, engine
    RENDER = auto()      # Buffer layout, frame output
    ZONE = auto()        # Zone layout
    SYSTEM = auto()      # Startup, shutdown, errors
    SHUTDOWN = auto()    # Shutdown handlers
