"""
Tests for AnimationConfig / RunConfig validation.
"""

from datetime import timedelta

import pytest

from models.color_source import TemperatureRange
from models.config import (
    DEFAULT_RUN_MINUTES,
    AnimationConfig,
    ConfigError,
    RunConfig,
    default_sources,
    seconds_to_interval,
)
from models.enums import AnimationModel, TransportKind


class TestAnimationConfig:

    def test_defaults(self):
        config = AnimationConfig()
        assert config.threshold == 0.001
        assert config.decay == 0.002
        assert config.max_intensity == 0.8
        assert config.sources == default_sources()
        assert config.model == AnimationModel.LOGNORMAL
        assert config.visibility_floor == 20

    def test_sources_list_becomes_tuple(self):
        config = AnimationConfig(sources=[TemperatureRange(2700, 3000)])
        assert config.sources == (TemperatureRange(2700, 3000),)

    def test_empty_sources_rejected(self):
        with pytest.raises(ConfigError):
            AnimationConfig(sources=())

    @pytest.mark.parametrize("kwargs", [
        {"threshold": -0.1},
        {"threshold": 1.5},
        {"threshold": "0.1"},
        {"threshold": True},
        {"decay": -0.001},
        {"max_intensity": 0.0},
        {"max_intensity": 1.01},
        {"model": "lognormal"},
        {"visibility_floor": -1},
        {"visibility_floor": 2.5},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            AnimationConfig(**kwargs)

    def test_threshold_edges_allowed(self):
        AnimationConfig(threshold=0.0)
        AnimationConfig(threshold=1.0)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestIntervals:

    def test_fractional_seconds(self):
        assert seconds_to_interval(0.02) == timedelta(microseconds=20000)

    def test_whole_and_fraction(self):
        assert seconds_to_interval(1.5) == timedelta(seconds=1, microseconds=500000)

    @pytest.mark.parametrize("value", [0, -1, "0.02", None])
    def test_invalid_interval(self, value):
        with pytest.raises(ConfigError):
            seconds_to_interval(value)


class TestRunConfig:

    def test_from_values(self):
        run = RunConfig.from_values(sleep_seconds=0.05, run_minutes=3, seed=7, transport=TransportKind.VIRTUAL)
        assert run.interval == timedelta(milliseconds=50)
        assert run.run_for == timedelta(minutes=3)
        assert run.seed == 7
        assert run.transport == TransportKind.VIRTUAL

    def test_default_run_is_effectively_forever(self):
        run = RunConfig.from_values()
        assert run.run_for == timedelta(minutes=DEFAULT_RUN_MINUTES)
        assert run.transport == TransportKind.AUTO

    @pytest.mark.parametrize("minutes", [-1, 1.5, "5"])
    def test_invalid_minutes(self, minutes):
        with pytest.raises(ConfigError):
            RunConfig.from_values(run_minutes=minutes)

    def test_invalid_seed(self):
        with pytest.raises(ConfigError):
            RunConfig(seed="abc")

    def test_zero_interval_rejected(self):
        with pytest.raises(ConfigError):
            RunConfig(interval=timedelta(0))
