"""
Zone Model

A zone is a named contiguous run of fixtures on one DMX universe:
head padding, animated body, tail padding.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence

# RGB fixtures - 3 DMX channels per pixel
CHANNELS_PER_PIXEL = 3
DMX_UNIVERSE_SIZE = 512


@dataclass(frozen=True)
class Zone:
    """
    Represents a single zone of fixtures

    Attributes:
        name: Zone identifier (e.g., "11a")
        head: Non-animated pixels before the body (always dark)
        body: Animated pixels
        tail: Non-animated pixels after the body (always dark)
        universe: DMX universe the zone is wired to

    Example:
        zone = Zone(name="11a", head=2, body=91, tail=3, universe=2)
        # physical_count = 96, channel_count = 288
    """
    name: str
    head: int
    body: int
    tail: int
    universe: int = 1

    def __post_init__(self):
        if min(self.head, self.body, self.tail) < 0:
            raise ValueError(f"Zone {self.name}: head/body/tail must be >= 0")
        if self.universe < 1:
            raise ValueError(f"Zone {self.name}: universe must be >= 1")
        if self.channel_count > DMX_UNIVERSE_SIZE:
            raise ValueError(
                f"Zone {self.name}: {self.physical_count} pixels need {self.channel_count} channels "
                f"(universe holds {DMX_UNIVERSE_SIZE})"
            )

    @property
    def physical_count(self) -> int:
        """All fixtures, padding included"""
        return self.head + self.body + self.tail

    @property
    def channel_count(self) -> int:
        return self.physical_count * CHANNELS_PER_PIXEL

    def __str__(self):
        return f"[{self.name:4}] U{self.universe} head={self.head} body={self.body:3} tail={self.tail}"


@dataclass(frozen=True)
class ZoneSpan:
    """Slice of the flat animated-pixel buffer owned by one zone."""
    zone: Zone
    start: int  # inclusive
    end: int    # exclusive

    def __len__(self) -> int:
        return self.end - self.start

    def to_slice(self) -> slice:
        return slice(self.start, self.end)


class ZoneLayout:
    """
    Ordered zones with a precomputed offset table

    Offsets are computed once here; the engine and renderer only ever
    slice the flat buffer with them.

    Usage:
        layout = ZoneLayout(zones)
        layout.pixel_count            # sum of body counts
        layout.span("11a").to_slice() # buffer slice for zone 11a
    """

    def __init__(self, zones: Sequence[Zone]) -> None:
        self._zones: List[Zone] = list(zones)
        self._spans: List[ZoneSpan] = []
        self._by_name: Dict[str, ZoneSpan] = {}

        offset = 0
        for zone in self._zones:
            if zone.name in self._by_name:
                raise ValueError(f"Duplicate zone name: {zone.name}")
            span = ZoneSpan(zone=zone, start=offset, end=offset + zone.body)
            self._spans.append(span)
            self._by_name[zone.name] = span
            offset = span.end

        self._pixel_count = offset

        # Zones sharing a universe are laid out back to back
        for universe in self.universes:
            channels = sum(z.channel_count for z in self._zones if z.universe == universe)
            if channels > DMX_UNIVERSE_SIZE:
                raise ValueError(f"Universe {universe}: zones need {channels} channels (max {DMX_UNIVERSE_SIZE})")

    @property
    def zones(self) -> List[Zone]:
        return list(self._zones)

    @property
    def spans(self) -> List[ZoneSpan]:
        return list(self._spans)

    @property
    def pixel_count(self) -> int:
        """Animated pixels across all zones (sum of bodies)"""
        return self._pixel_count

    @property
    def universes(self) -> List[int]:
        """Distinct universes in zone order"""
        seen: List[int] = []
        for zone in self._zones:
            if zone.universe not in seen:
                seen.append(zone.universe)
        return seen

    def span(self, name: str) -> ZoneSpan:
        """
        Raises:
            KeyError: If no zone has that name
        """
        return self._by_name[name]

    def __iter__(self) -> Iterator[ZoneSpan]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._zones)
