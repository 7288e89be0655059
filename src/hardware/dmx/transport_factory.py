# transport_factory.py

from hardware.dmx.ola_transport import OlaConfig, OlaTransport
from hardware.dmx.transport_interface import IDmxTransport
from hardware.dmx.virtual_transport import VirtualTransport
from models.enums import TransportKind
from runtime.runtime_info import RuntimeInfo
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def create_transport(kind: TransportKind, ola_config: OlaConfig = OlaConfig()) -> IDmxTransport:
    """
    AUTO falls back to the virtual transport when OLA is not installed,
    so the animation runs on a dev machine without fixtures.
    """
    if kind == TransportKind.VIRTUAL:
        return VirtualTransport()

    has_ola = RuntimeInfo.has_executable(ola_config.executable)

    if kind == TransportKind.OLA:
        if not has_ola:
            log.warn(f"{ola_config.executable} not found on PATH, frames will fail to send")
        return OlaTransport(ola_config)

    if has_ola:
        return OlaTransport(ola_config)

    log.info("OLA not available, using virtual transport")
    return VirtualTransport()
