"""
Base Pixel Policy

A policy is the per-tick transition rule for one pixel. Subclasses
implement the lit-pixel update and what happens on the ignition tick.
"""

import random
from models.color import Color
from models.config import AnimationConfig
from models.enums import AnimationModel, PixelTransition
from models.pixel import Pixel
from utils.logger import LogCategory, LogLevel, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class BasePixelPolicy:
    """
    Base class for pixel transition policies

    IMPORTANT:
    - One policy instance serves every pixel; it holds no per-pixel state.
    - step() must leave the pixel either lit with a non-black render
      or in the canonical dark state.
    - Random draws happen in a fixed order per pixel:
      ignition draw, source index, color sample, then policy-specific draws.

    Subclasses MUST implement:
        on_ignite(pixel, rng)  -> PixelTransition
        step_lit(pixel, rng)   -> PixelTransition
    """
    MODEL: AnimationModel

    def __init__(self, config: AnimationConfig):
        self.config = config

    # ------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------

    def step(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        """Advance one pixel by exactly one tick"""
        if pixel.is_dark:
            return self._step_dark(pixel, rng)
        return self.step_lit(pixel, rng)

    def _step_dark(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        if rng.random() >= self.config.threshold:
            return PixelTransition.IDLE

        pixel.ignite(self.choose_color(rng))
        return self.on_ignite(pixel, rng)

    def choose_color(self, rng: random.Random) -> Color:
        """Pick a color source uniformly and let it sample the color"""
        sources = self.config.sources
        source = sources[rng.randrange(len(sources))]
        return source.pick(rng)

    def on_ignite(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        raise NotImplementedError

    def step_lit(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        raise NotImplementedError

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def extinguish(self, pixel: Pixel) -> PixelTransition:
        if log.is_enabled_for(LogLevel.DEBUG):
            log.debug("Pixel extinguished", age=pixel.age)
        pixel.extinguish()
        return PixelTransition.EXTINGUISHED

