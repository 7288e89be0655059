"""
Shared test setup: src/ on sys.path, small layouts and scripted randomness.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from models.zone import Zone, ZoneLayout


class ScriptedRandom:
    """
    Stand-in for random.Random that replays fixed draws.

    random() pops the next scripted value; randrange() always picks index 0.
    """

    def __init__(self, draws):
        self.draws = list(draws)

    def random(self) -> float:
        if not self.draws:
            raise AssertionError("ScriptedRandom ran out of draws")
        return self.draws.pop(0)

    def randrange(self, n: int) -> int:
        return 0


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng([0.0, 0.5, ...])"""
    return ScriptedRandom


@pytest.fixture
def single_pixel_layout():
    return ZoneLayout([Zone(name="solo", head=0, body=1, tail=0, universe=1)])


@pytest.fixture
def small_layout():
    """Two zones sharing universe 1, one zone on universe 2 (8 animated pixels)"""
    return ZoneLayout([
        Zone(name="a", head=1, body=2, tail=1, universe=1),
        Zone(name="b", head=0, body=1, tail=2, universe=1),
        Zone(name="c", head=2, body=5, tail=0, universe=2),
    ])


@pytest.fixture
def default_zones():
    """Zones of the shipped configuration"""
    return [
        Zone(name="10", head=0, body=44, tail=3, universe=1),
        Zone(name="11a", head=2, body=91, tail=3, universe=2),
        Zone(name="11b", head=2, body=92, tail=2, universe=3),
        Zone(name="12a", head=2, body=90, tail=3, universe=4),
        Zone(name="12b", head=2, body=91, tail=3, universe=5),
        Zone(name="13", head=2, body=43, tail=0, universe=6),
    ]
