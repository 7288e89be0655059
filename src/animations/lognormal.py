"""
Log-normal flicker (default model)

Each lit pixel keeps the color it ignited with and follows a fixed
brightness curve over its age: a quick flare, then a long fade.
"""

import random

from animations.base import BasePixelPolicy
from animations.curves import age_to_intensity, peak_age
from models.enums import AnimationModel, PixelTransition
from models.pixel import Pixel
from utils.logger import LogCategory, LogLevel, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class LogNormalPolicy(BasePixelPolicy):
    """
    Age-driven decay along the log-normal curve

    - Ignition tick renders age 1. A color too dim to show at age 1 starts
      at the first age that is visible; if nothing is visible even at the
      peak the pixel goes straight back to dark.
    - Every lit tick: age += 1, intensity = curve(age) * max_intensity.
    - Extinguish once the dimmed color rounds to black.
    """

    MODEL = AnimationModel.LOGNORMAL

    def __init__(self, config):
        super().__init__(config)
        self._peak_age = peak_age()

    def intensity_at(self, age: int) -> float:
        """Effective brightness fraction for a given age (0..max_intensity)"""
        curve = min(1.0, max(0.0, age_to_intensity(age)))
        return curve * self.config.max_intensity

    def on_ignite(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        ceiling = self.config.max_intensity
        rendered = pixel.show(self.intensity_at(pixel.age), ceiling)

        while rendered.is_black and pixel.age < self._peak_age:
            pixel.age += 1
            rendered = pixel.show(self.intensity_at(pixel.age), ceiling)

        if rendered.is_black:
            return self.extinguish(pixel)

        if log.is_enabled_for(LogLevel.DEBUG):
            log.debug("Pixel ignited", color=pixel.color_choice, age=pixel.age, rgb=rendered.to_rgb())
        return PixelTransition.IGNITED

    def step_lit(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        pixel.age += 1
        intensity = self.intensity_at(pixel.age)
        if intensity <= 0.0:
            return self.extinguish(pixel)

        rendered = pixel.show(intensity, self.config.max_intensity)
        if rendered.is_black:
            return self.extinguish(pixel)

        return PixelTransition.RISING if pixel.age <= self._peak_age else PixelTransition.FALLING
