"""
Zone Manager

Parses the zone list from config and builds the ZoneLayout offset table.
"""

from typing import List

from models.config import ConfigError
from models.zone import Zone, ZoneLayout
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ZONE)


class ZoneManager:
    """
    Manages the ordered zone list

    Zone order in the config is the wiring order; it is never re-sorted.
    Zones without an explicit universe get their 1-based position.

    Example:
        zones_config = [
            {"name": "10", "head": 0, "body": 44, "tail": 3},
            {"name": "11a", "head": 2, "body": 91, "tail": 3, "universe": 2},
        ]
        layout = ZoneManager(zones_config).layout
        layout.pixel_count  # 135
    """

    def __init__(self, zones_config: List[dict]):
        """
        Args:
            zones_config: List of zone dicts from zones.yaml

        Raises:
            ConfigError: Missing/invalid fields, duplicate names, universe overflow
        """
        self.zones: List[Zone] = self._load_zones(zones_config or [])
        try:
            self.layout = ZoneLayout(self.zones)
        except ValueError as ex:
            raise ConfigError(str(ex)) from ex

    def _load_zones(self, config: List[dict]) -> List[Zone]:
        if not config:
            raise ConfigError("No zones defined in config")

        zones = []
        for position, zone_dict in enumerate(config, start=1):
            try:
                zone = Zone(
                    name=str(zone_dict["name"]),
                    head=int(zone_dict.get("head", 0)),
                    body=int(zone_dict["body"]),
                    tail=int(zone_dict.get("tail", 0)),
                    universe=int(zone_dict.get("universe", position)),
                )
            except KeyError as ex:
                raise ConfigError(f"Zone #{position} is missing field {ex}") from ex
            except (TypeError, ValueError) as ex:
                raise ConfigError(f"Zone #{position}: {ex}") from ex
            zones.append(zone)
        return zones

    def print_summary(self):
        """Log zone configuration summary"""
        log.info(f"Zone layout: {len(self.zones)} zones, {self.layout.pixel_count} animated pixels")
        for zone in self.zones:
            log.debug(str(zone))
