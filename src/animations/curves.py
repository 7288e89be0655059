"""
Intensity curves

Pure numeric helpers shared by the pixel policies.
"""

import math

# Log-normal shape: quick flare, long fading tail
SIGMA = 0.5
MU = 0.0
# Stretch the age axis so a pixel stays lit 4x longer
AGE_STRETCH = 4.0


def age_to_intensity(age: int, sigma: float = SIGMA, mu: float = MU, stretch: float = AGE_STRETCH) -> float:
    """
    Log-normal probability density evaluated at age / stretch

    Rises from ~0.017 at age 1 to a single peak (~0.80 at age 4)
    and decays toward 0 with a long tail.

    Args:
        age: Ticks lit (>= 1 while lit)

    Returns:
        Intensity >= 0 (0 for age <= 0)
    """
    fage = age / stretch
    if fage <= 0:
        return 0.0
    log_age = math.log(fage) - mu
    normalizer = 1.0 / (sigma * math.sqrt(2.0 * math.pi))
    return normalizer * math.exp(-(log_age * log_age) / (2.0 * sigma * sigma))


def peak_age(mu: float = MU, stretch: float = AGE_STRETCH) -> int:
    """First whole age at or past the curve's maximum (age 4 by default)"""
    return max(1, math.ceil(stretch * math.exp(mu)))


def rise(intensity: float, draw: float, decay: float, ceiling: float) -> float:
    """
    Approach the ceiling by a random fraction of the remaining gap

    Climb slows down near the cap and never passes it.
    """
    gap = max(0.0, ceiling - intensity)
    return min(ceiling, intensity + draw * decay * gap)


def fall(intensity: float, draw: float, decay: float) -> float:
    """Drop by a random fraction of decay, clamped at 0"""
    return max(0.0, intensity - draw * decay)
