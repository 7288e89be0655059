"""
Pixel animation system

Current implementation:
- engine: AnimationEngine + policy registry
- base: Base pixel policy (ignition, color choice)
- lognormal, drift: Transition models
- curves: Brightness curve and rise/fall steps
"""

__all__ = [
    "engine",
    "base",
    "lognormal",
    "drift",
    "curves",
]
