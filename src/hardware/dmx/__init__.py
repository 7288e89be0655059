from .transport_interface import IDmxTransport
from .virtual_transport import VirtualTransport
from .ola_transport import OlaTransport, OlaConfig
from .renderer import DmxRenderer
from .transport_factory import create_transport

__all__ = [
    'IDmxTransport',
    'VirtualTransport',
    'OlaTransport',
    'OlaConfig',
    'DmxRenderer',
    'create_transport',
]
