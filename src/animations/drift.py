"""
Drift flicker (alternative model)

Lit pixels wander: each tick they either climb toward the ceiling or
sink by a random step. Older pixels are more likely to sink, so every
light eventually fades out below visibility.
"""

import random

from animations.base import BasePixelPolicy
from animations.curves import fall, rise
from models.enums import AnimationModel, PixelTransition
from models.pixel import Pixel
from utils.logger import LogCategory, LogLevel, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class DriftPolicy(BasePixelPolicy):
    """
    Continuous intensity with stochastic rise/fall

    - Ignition: intensity uniform in (0, max_intensity].
    - Lit: draw u; falling when u > 1/age, rising otherwise.
      Rising approaches max_intensity, falling drops by up to decay.
    - Falling pixels are clamped at 0 and extinguished once the
      gamma-corrected channel sum drops below visibility_floor.
    """

    MODEL = AnimationModel.DRIFT

    def on_ignite(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        ceiling = self.config.max_intensity
        # 1 - random() lies in (0, 1], so a fresh pixel is never at 0
        rendered = pixel.show((1.0 - rng.random()) * ceiling, ceiling)
        if rendered.is_black:
            return self.extinguish(pixel)

        if log.is_enabled_for(LogLevel.DEBUG):
            log.debug("Pixel ignited", color=pixel.color_choice, intensity=f"{pixel.intensity:.3f}")
        return PixelTransition.IGNITED

    def step_lit(self, pixel: Pixel, rng: random.Random) -> PixelTransition:
        cfg = self.config
        falling = rng.random() > 1.0 / pixel.age

        if falling:
            intensity = fall(pixel.intensity, rng.random(), cfg.decay)
            pixel.age += 1
            if intensity <= 0.0:
                return self.extinguish(pixel)

            rendered = pixel.show(intensity, cfg.max_intensity)
            if rendered.is_black or rendered.gamma_corrected().channel_sum < cfg.visibility_floor:
                return self.extinguish(pixel)
            return PixelTransition.FALLING

        intensity = rise(pixel.intensity, rng.random(), cfg.decay, cfg.max_intensity)
        pixel.age += 1
        pixel.show(intensity, cfg.max_intensity)
        return PixelTransition.RISING
