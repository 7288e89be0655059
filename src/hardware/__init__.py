"""
Hardware Layer

Low-level output only:

- DMX transports (IDmxTransport, VirtualTransport, OlaTransport)
- DmxRenderer: engine buffer -> per-universe channel frames
"""
from .dmx import IDmxTransport, VirtualTransport, OlaTransport, OlaConfig, DmxRenderer, create_transport

__all__ = [
    "IDmxTransport",
    "VirtualTransport",
    "OlaTransport",
    "OlaConfig",
    "DmxRenderer",
    "create_transport",
]
