"""
Pixel model - animation state of one physical fixture
"""

from dataclasses import dataclass, field
from typing import Optional

from models.color import Color


@dataclass
class Pixel:
    """
    Mutable per-fixture animation state

    Attributes:
        intensity: Effective brightness fraction (0 = dark, <= max intensity)
        age: Position on the brightness curve; 1 on a normal ignition tick and
            +1 per lit tick after. A Model A color too dim for age 1 ignites
            further along the curve, so age can exceed ticks since ignition.
            0 = dark
        color_choice: Full-brightness color sampled at ignition
        rendered: Last color handed to the renderer

    Dark state is canonical: age 0, intensity 0, no color choice, black render.
    """
    intensity: float = 0.0
    age: int = 0
    color_choice: Optional[Color] = None
    rendered: Color = field(default_factory=Color.black)

    @property
    def is_lit(self) -> bool:
        return self.age > 0

    @property
    def is_dark(self) -> bool:
        return self.age == 0

    def ignite(self, color: Color) -> None:
        """Start a new life with the sampled color (age 1)."""
        self.color_choice = color
        self.age = 1

    def extinguish(self) -> None:
        """Return to the canonical dark state."""
        self.intensity = 0.0
        self.age = 0
        self.color_choice = None
        self.rendered = Color.black()

    def show(self, intensity: float, ceiling: float) -> Color:
        """
        Derive the rendered color from color_choice at the given intensity

        Returns:
            The new rendered color (may be black; callers decide to extinguish)
        """
        self.intensity = max(0.0, min(intensity, ceiling))
        if self.color_choice is None:
            self.rendered = Color.black()
        else:
            self.rendered = self.color_choice.with_intensity(self.intensity, ceiling)
        return self.rendered

    def __str__(self) -> str:
        if self.is_dark:
            return "Pixel(dark)"
        return f"Pixel(age={self.age}, intensity={self.intensity:.4f}, rgb={self.rendered.to_rgb()})"
