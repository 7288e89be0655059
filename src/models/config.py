"""
Animation and run configuration

Immutable, validated parameter sets. Everything is checked here so the
engine can assume well-formed numbers.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple

from models.color_source import ColorSource, TemperatureRange
from models.enums import AnimationModel, TransportKind

DEFAULT_THRESHOLD = 0.001
DEFAULT_DECAY = 0.002
DEFAULT_MAX_INTENSITY = 0.8
DEFAULT_VISIBILITY_FLOOR = 20
DEFAULT_SLEEP_SECONDS = 0.02
DEFAULT_RUN_MINUTES = 2**31 - 1


class ConfigError(ValueError):
    """Invalid configuration, raised before the engine is built."""


def default_sources() -> Tuple[ColorSource, ...]:
    # warm white to cool white
    return (TemperatureRange(2700, 5500),)


@dataclass(frozen=True)
class AnimationConfig:
    """
    Parameters of the per-pixel transition rule

    Attributes:
        threshold: Probability that a dark pixel ignites on a tick (0..1)
        decay: Step size of the drift model's rise/fall updates
        max_intensity: Brightness ceiling (0 < max <= 1)
        sources: Color sources sampled at ignition (non-empty)
        model: Transition policy
        visibility_floor: Drift model extinguishes below this gamma-corrected channel sum
    """
    threshold: float = DEFAULT_THRESHOLD
    decay: float = DEFAULT_DECAY
    max_intensity: float = DEFAULT_MAX_INTENSITY
    sources: Tuple[ColorSource, ...] = field(default_factory=default_sources)
    model: AnimationModel = AnimationModel.LOGNORMAL
    visibility_floor: int = DEFAULT_VISIBILITY_FLOOR

    def __post_init__(self):
        # normalize lists from YAML/CLI into a tuple
        object.__setattr__(self, "sources", tuple(self.sources))
        self.validate()

    def validate(self) -> None:
        """
        Raises:
            ConfigError: On any out-of-range or missing parameter
        """
        for name in ("threshold", "decay", "max_intensity"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")

        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigError(f"threshold must be within 0..1, got {self.threshold}")
        if self.decay < 0:
            raise ConfigError(f"decay must be >= 0, got {self.decay}")
        if not 0.0 < self.max_intensity <= 1.0:
            raise ConfigError(f"max_intensity must be within (0, 1], got {self.max_intensity}")
        if not self.sources:
            raise ConfigError("At least one color source (temperature or RGB range) is required")
        if not isinstance(self.model, AnimationModel):
            raise ConfigError(f"Unknown animation model: {self.model!r}")
        if isinstance(self.visibility_floor, bool) or not isinstance(self.visibility_floor, int) \
                or self.visibility_floor < 0:
            raise ConfigError(f"visibility_floor must be a non-negative integer, got {self.visibility_floor!r}")


def seconds_to_interval(seconds: float) -> timedelta:
    """
    Convert fractional seconds to a tick interval

    Split into whole seconds plus the sub-second remainder (microseconds).

    Raises:
        ConfigError: If seconds is not a positive number
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
        raise ConfigError(f"Sleep interval must be a positive number of seconds, got {seconds!r}")
    whole = int(seconds)
    micros = int(round((seconds - whole) * 1_000_000))
    return timedelta(seconds=whole, microseconds=micros)


@dataclass(frozen=True)
class RunConfig:
    """
    Run loop timing and output selection

    Attributes:
        interval: Sleep between ticks
        run_for: Wall-clock run duration
        seed: Random seed (None = nondeterministic)
        transport: DMX transport kind
    """
    interval: timedelta = field(default_factory=lambda: seconds_to_interval(DEFAULT_SLEEP_SECONDS))
    run_for: timedelta = field(default_factory=lambda: timedelta(minutes=DEFAULT_RUN_MINUTES))
    seed: Optional[int] = None
    transport: TransportKind = TransportKind.AUTO

    def __post_init__(self):
        if self.interval <= timedelta(0):
            raise ConfigError(f"interval must be positive, got {self.interval}")
        if self.run_for < timedelta(0):
            raise ConfigError(f"run_for must be >= 0, got {self.run_for}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")

    @classmethod
    def from_values(
        cls,
        sleep_seconds: float = DEFAULT_SLEEP_SECONDS,
        run_minutes: int = DEFAULT_RUN_MINUTES,
        seed: Optional[int] = None,
        transport: TransportKind = TransportKind.AUTO,
    ) -> 'RunConfig':
        if isinstance(run_minutes, bool) or not isinstance(run_minutes, int) or run_minutes < 0:
            raise ConfigError(f"run_for must be a non-negative number of minutes, got {run_minutes!r}")
        return cls(
            interval=seconds_to_interval(sleep_seconds),
            run_for=_minutes(run_minutes),
            seed=seed,
            transport=transport,
        )


def _minutes(value: int) -> timedelta:
    try:
        return timedelta(minutes=value)
    except OverflowError:
        return timedelta.max
