"""
Tests for AnimationEngine and the module-level tick().
"""

import random

import pytest

from animations.drift import DriftPolicy
from animations.engine import POLICIES, AnimationEngine, build_policy, tick
from animations.lognormal import LogNormalPolicy
from models.color import Color
from models.color_source import RGBRange, TemperatureRange
from models.config import AnimationConfig
from models.enums import AnimationModel, PixelTransition
from models.pixel import Pixel


def config_for(model: AnimationModel, **overrides) -> AnimationConfig:
    params = dict(threshold=0.05, decay=0.01, max_intensity=0.8, model=model)
    params.update(overrides)
    return AnimationConfig(**params)


def assert_invariants(engine: AnimationEngine):
    """Dark state is canonical; lit pixels always show something."""
    assert len(engine.buffer) == engine.pixel_count
    for pixel, color in zip(engine.pixels, engine.buffer):
        assert color == pixel.rendered
        if pixel.age == 0:
            assert pixel.intensity == 0.0
            assert pixel.color_choice is None
            assert pixel.rendered == Color.black()
        else:
            assert pixel.age > 0
            assert not pixel.rendered.is_black
            assert 0.0 <= pixel.intensity <= engine.config.max_intensity


class TestPolicyRegistry:

    def test_every_model_registered(self):
        assert set(POLICIES) == set(AnimationModel)

    def test_build_policy(self):
        assert isinstance(build_policy(config_for(AnimationModel.LOGNORMAL)), LogNormalPolicy)
        assert isinstance(build_policy(config_for(AnimationModel.DRIFT)), DriftPolicy)


class TestThresholdEdges:

    @pytest.mark.parametrize("model", list(AnimationModel))
    def test_threshold_zero_never_ignites(self, model, small_layout):
        engine = AnimationEngine(small_layout, config_for(model, threshold=0.0), rng=random.Random(3))
        for _ in range(200):
            buffer = engine.tick()
            assert all(c.is_black for c in buffer)
        assert engine.lit_count == 0

    @pytest.mark.parametrize("model", list(AnimationModel))
    def test_threshold_one_ignites_every_dark_pixel(self, model, small_layout):
        """Every dark pixel ignites; a drift pixel drawn too dim to show goes straight back dark."""
        engine = AnimationEngine(small_layout, config_for(model, threshold=1.0), rng=random.Random(3))
        engine.tick()
        assert engine.last_transitions[PixelTransition.IDLE] == 0
        assert engine.ignitions_last_tick() + engine.extinctions_last_tick() == engine.pixel_count

    def test_threshold_one_lights_everything_on_first_tick(self, small_layout):
        engine = AnimationEngine(small_layout, config_for(AnimationModel.LOGNORMAL, threshold=1.0))
        engine.tick()
        assert engine.lit_count == engine.pixel_count
        assert engine.ignitions_last_tick() == engine.pixel_count


class TestInvariants:

    @pytest.mark.parametrize("model", list(AnimationModel))
    def test_invariants_hold_every_tick(self, model, small_layout):
        engine = AnimationEngine(small_layout, config_for(model, threshold=0.2), rng=random.Random(42))
        for _ in range(400):
            engine.tick()
            assert_invariants(engine)

    @pytest.mark.parametrize("model", list(AnimationModel))
    def test_output_never_above_ceiling(self, model, small_layout):
        config = config_for(
            model,
            threshold=0.3,
            max_intensity=0.5,
            sources=(RGBRange(Color.from_hex("FFFFFF"), Color.from_hex("FFFFFF")),),
        )
        engine = AnimationEngine(small_layout, config, rng=random.Random(9))
        for _ in range(300):
            for color in engine.tick():
                assert max(color.to_rgb()) <= 128

    @pytest.mark.parametrize("model", list(AnimationModel))
    def test_tick_never_raises(self, model, small_layout):
        for seed in range(5):
            for threshold in (0.0, 0.001, 0.5, 1.0):
                config = config_for(
                    model,
                    threshold=threshold,
                    decay=seed * 0.3,
                    sources=(TemperatureRange(1000, 40000), RGBRange(Color.black(), Color.from_hex("FFFFFF"))),
                )
                engine = AnimationEngine(small_layout, config, rng=random.Random(seed))
                for _ in range(50):
                    engine.tick()
                assert engine.tick_count == 50


class TestStatistics:

    def test_ignition_rate_converges(self, small_layout):
        config = config_for(AnimationModel.LOGNORMAL, threshold=0.1, max_intensity=1.0)
        engine = AnimationEngine(small_layout, config, rng=random.Random(2024))
        trials = ignitions = 0
        for _ in range(5000):
            trials += engine.pixel_count - engine.lit_count
            engine.tick()
            ignitions += engine.ignitions_last_tick()

        # roughly 12000 dark-pixel draws, sigma of the rate about 0.003
        assert trials > 5000
        assert abs(ignitions / trials - 0.1) < 0.015

    def test_same_seed_same_animation(self, small_layout):
        config = config_for(AnimationModel.DRIFT, threshold=0.1)
        a = AnimationEngine(small_layout, config, rng=random.Random(77))
        b = AnimationEngine(small_layout, config, rng=random.Random(77))
        for _ in range(200):
            assert a.tick() == b.tick()


class TestEngineHelpers:

    def test_starts_dark(self, small_layout):
        engine = AnimationEngine(small_layout, config_for(AnimationModel.LOGNORMAL))
        assert engine.pixel_count == 8
        assert engine.lit_count == 0
        assert all(c == Color.black() for c in engine.buffer)

    def test_reset(self, small_layout):
        engine = AnimationEngine(small_layout, config_for(AnimationModel.LOGNORMAL, threshold=1.0))
        engine.tick()
        engine.reset()
        assert engine.lit_count == 0
        assert all(p.is_dark for p in engine.pixels)
        assert all(c.is_black for c in engine.buffer)

    def test_zone_views(self, small_layout):
        engine = AnimationEngine(small_layout, config_for(AnimationModel.LOGNORMAL, threshold=1.0))
        engine.tick()
        assert len(engine.zone_buffer("a")) == 2
        assert len(engine.zone_buffer("b")) == 1
        assert len(engine.zone_pixels("c")) == 5
        assert engine.zone_pixels("b")[0] is engine.pixels[2]

    def test_unknown_zone(self, small_layout):
        engine = AnimationEngine(small_layout, config_for(AnimationModel.LOGNORMAL))
        with pytest.raises(KeyError):
            engine.zone_buffer("zz")

    def test_policy_extinguish_idempotent(self):
        policy = build_policy(config_for(AnimationModel.DRIFT))
        pixel = Pixel()
        pixel.ignite(Color.from_kelvin(3000))
        pixel.show(0.5, 0.8)
        policy.extinguish(pixel)
        policy.extinguish(pixel)
        assert pixel.is_dark
        assert pixel.rendered == Color.black()


class TestModuleTick:

    def test_tick_returns_buffer(self):
        pixels = [Pixel() for _ in range(20)]
        config = config_for(AnimationModel.LOGNORMAL, threshold=1.0)
        buffer = tick(pixels, config, random.Random(0))
        assert len(buffer) == 20
        assert all(p.age == 1 for p in pixels)
        assert buffer == [p.rendered for p in pixels]

    def test_tick_with_prebuilt_policy(self):
        pixels = [Pixel() for _ in range(5)]
        config = config_for(AnimationModel.DRIFT, threshold=0.0)
        buffer = tick(pixels, config, random.Random(0), policy=build_policy(config))
        assert all(c.is_black for c in buffer)
