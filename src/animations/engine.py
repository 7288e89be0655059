"""
Animation Engine

Owns the pixel array for every zone and advances it one tick at a time.
Each tick produces a flat color buffer, index-aligned with the pixels,
which the renderer lays out onto DMX universes.
"""

import random
from collections import Counter
from typing import Dict, List, Optional, Type

from animations.base import BasePixelPolicy
from animations.drift import DriftPolicy
from animations.lognormal import LogNormalPolicy
from models.color import Color
from models.config import AnimationConfig
from models.enums import AnimationModel, PixelTransition
from models.pixel import Pixel
from models.zone import ZoneLayout
from utils.logger import LogCategory, get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


def _build_policy_registry() -> Dict[AnimationModel, Type[BasePixelPolicy]]:
    """Map every AnimationModel to its policy class"""
    class_map = {
        AnimationModel.LOGNORMAL: LogNormalPolicy,
        AnimationModel.DRIFT: DriftPolicy,
    }
    missing = [m.name for m in AnimationModel if m not in class_map]
    if missing:
        raise RuntimeError(f"No pixel policy registered for: {missing}")
    return class_map


POLICIES: Dict[AnimationModel, Type[BasePixelPolicy]] = _build_policy_registry()


def build_policy(config: AnimationConfig) -> BasePixelPolicy:
    return POLICIES[config.model](config)


def tick(
    pixels: List[Pixel],
    config: AnimationConfig,
    rng: random.Random,
    policy: Optional[BasePixelPolicy] = None,
) -> List[Color]:
    """
    Advance every pixel exactly once and return the color buffer

    Pixels are mutated in place, in index order, drawing from the single
    rng stream. No pixel's update depends on another pixel.

    Args:
        pixels: Pixel array (mutated)
        config: Animation parameters
        rng: Random source shared by all draws of the tick
        policy: Prebuilt policy for config (built on the fly if omitted)

    Returns:
        Rendered colors, one per pixel
    """
    policy = policy or build_policy(config)
    for pixel in pixels:
        policy.step(pixel, rng)
    return [pixel.rendered for pixel in pixels]


class AnimationEngine:
    """
    Flicker engine for a zone layout

    • Pixel array sized to the sum of zone bodies, all dark at start
    • tick() advances everything once and returns the buffer
    • Per-zone views come from the layout's precomputed offsets

    Example:
        engine = AnimationEngine(layout, config, rng=random.Random(7))
        buffer = engine.tick()
        engine.zone_buffer("11a")
    """

    def __init__(self, layout: ZoneLayout, config: AnimationConfig, rng: Optional[random.Random] = None):
        self.layout = layout
        self.config = config
        self.rng = rng or random.Random()
        self.policy = build_policy(config)

        self.pixels: List[Pixel] = [Pixel() for _ in range(layout.pixel_count)]
        self.buffer: List[Color] = [Color.black()] * layout.pixel_count
        self.tick_count = 0
        self.last_transitions: Counter = Counter()

        log.info(
            "AnimationEngine initialized",
            model=config.model.name,
            pixels=layout.pixel_count,
            zones=len(layout),
            threshold=config.threshold,
            max_intensity=f"{config.max_intensity:.3f}",
            sources=", ".join(str(s) for s in config.sources),
        )

    # ============================================================
    # Core
    # ============================================================

    def tick(self) -> List[Color]:
        """Advance all pixels one tick; returns the new color buffer"""
        transitions: Counter = Counter()
        step = self.policy.step
        rng = self.rng
        for pixel in self.pixels:
            transitions[step(pixel, rng)] += 1

        self.buffer = [pixel.rendered for pixel in self.pixels]
        self.last_transitions = transitions
        self.tick_count += 1
        return self.buffer

    def reset(self) -> None:
        """Return every pixel to the dark state"""
        for pixel in self.pixels:
            pixel.extinguish()
        self.buffer = [Color.black()] * len(self.pixels)
        log.debug("All pixels reset to dark")

    # ------------------------------------------------------------------
    # RUNTIME HELPERS
    # ------------------------------------------------------------------

    @property
    def pixel_count(self) -> int:
        return len(self.pixels)

    @property
    def lit_count(self) -> int:
        return sum(1 for p in self.pixels if p.is_lit)

    def zone_buffer(self, zone_name: str) -> List[Color]:
        """
        Last rendered colors of one zone's body

        Raises:
            KeyError: Unknown zone name
        """
        return self.buffer[self.layout.span(zone_name).to_slice()]

    def zone_pixels(self, zone_name: str) -> List[Pixel]:
        return self.pixels[self.layout.span(zone_name).to_slice()]

    def ignitions_last_tick(self) -> int:
        return self.last_transitions.get(PixelTransition.IGNITED, 0)

    def extinctions_last_tick(self) -> int:
        return self.last_transitions.get(PixelTransition.EXTINGUISHED, 0)
