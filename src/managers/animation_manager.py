"""
Animation Manager - Builds the animation and run parameters

Processes the 'animation' and 'run' sections from ConfigManager (does NOT load files).
Single responsibility: turn raw YAML values into validated AnimationConfig / RunConfig.
"""

from typing import Any, Dict, List, Optional

from models.color_source import ColorSource, parse_rgb_range, parse_temperature_range
from models.config import (
    DEFAULT_DECAY,
    DEFAULT_MAX_INTENSITY,
    DEFAULT_RUN_MINUTES,
    DEFAULT_SLEEP_SECONDS,
    DEFAULT_THRESHOLD,
    DEFAULT_VISIBILITY_FLOOR,
    AnimationConfig,
    ConfigError,
    RunConfig,
    default_sources,
)
from models.enums import AnimationModel, TransportKind
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class AnimationManager:
    """
    Animation parameter manager (data processor only)

    Example:
        manager = AnimationManager({
            'animation': {'threshold': 0.01, 'temperature_ranges': ['2700:5500']},
            'run': {'sleep': 0.02, 'run_for': 5},
        })
        anim = manager.get_animation_config()
        run = manager.get_run_config()
    """

    def __init__(self, data: dict):
        """
        Args:
            data: Config dict with optional 'animation' and 'run' sections
        """
        self.animation_data: Dict[str, Any] = dict(data.get('animation') or {})
        self.run_data: Dict[str, Any] = dict(data.get('run') or {})

    def get_sources(self) -> List[ColorSource]:
        """
        Temperature ranges first, then RGB ranges

        The default range is used only when neither key is present; explicitly
        empty lists are passed through and rejected by AnimationConfig.

        Raises:
            ConfigError: Malformed range string
        """
        temps = self.animation_data.get('temperature_ranges') or []
        rgbs = self.animation_data.get('rgb_ranges') or []

        sources: List[ColorSource] = []
        try:
            sources.extend(parse_temperature_range(str(t)) for t in temps)
            sources.extend(parse_rgb_range(str(c)) for c in rgbs)
        except ValueError as ex:
            raise ConfigError(str(ex)) from ex

        configured = "temperature_ranges" in self.animation_data or "rgb_ranges" in self.animation_data
        if not sources and not configured:
            sources = list(default_sources())
            log.debug("No color ranges configured, using default", source=str(sources[0]))
        return sources

    def get_animation_config(self) -> AnimationConfig:
        """
        Raises:
            ConfigError: Any invalid animation parameter
        """
        data = self.animation_data
        try:
            model = EnumHelper.to_enum(AnimationModel, data.get('model', 'lognormal'))
        except (TypeError, ValueError) as ex:
            raise ConfigError(str(ex)) from ex

        config = AnimationConfig(
            threshold=data.get('threshold', DEFAULT_THRESHOLD),
            decay=data.get('decay', DEFAULT_DECAY),
            max_intensity=data.get('max_intensity', DEFAULT_MAX_INTENSITY),
            sources=tuple(self.get_sources()),
            model=model,
            visibility_floor=data.get('visibility_floor', DEFAULT_VISIBILITY_FLOOR),
        )
        log.info(
            "Animation config built",
            model=model.name,
            threshold=config.threshold,
            decay=config.decay,
            max_intensity=f"{config.max_intensity:.3f}",
            sources=len(config.sources),
        )
        return config

    def get_run_config(self) -> RunConfig:
        """
        Raises:
            ConfigError: Any invalid run parameter
        """
        data = self.run_data
        try:
            transport = EnumHelper.to_enum(TransportKind, data.get('transport', 'auto'))
        except (TypeError, ValueError) as ex:
            raise ConfigError(str(ex)) from ex

        seed: Optional[int] = data.get('seed')
        return RunConfig.from_values(
            sleep_seconds=data.get('sleep', DEFAULT_SLEEP_SECONDS),
            run_minutes=data.get('run_for', DEFAULT_RUN_MINUTES),
            seed=seed,
            transport=transport,
        )
