"""
Tests for EnumHelper name parsing.
"""

import pytest

from models.enums import AnimationModel, LogLevel, TransportKind
from utils.enum_helper import EnumHelper


class TestEnumHelper:

    def test_from_string_case_insensitive(self):
        assert EnumHelper.from_string(AnimationModel, "Drift") == AnimationModel.DRIFT
        assert EnumHelper.from_string(TransportKind, " ola ") == TransportKind.OLA

    def test_from_string_case_sensitive(self):
        with pytest.raises(ValueError):
            EnumHelper.from_string(LogLevel, "debug", case_insensitive=False)
        assert EnumHelper.from_string(LogLevel, "DEBUG", case_insensitive=False) == LogLevel.DEBUG

    def test_unknown_name_lists_choices(self):
        with pytest.raises(ValueError, match="lognormal"):
            EnumHelper.from_string(AnimationModel, "sparkle")

    def test_default(self):
        assert EnumHelper.from_string(TransportKind, "dmx", default=TransportKind.AUTO) == TransportKind.AUTO

    def test_not_an_enum(self):
        with pytest.raises(TypeError):
            EnumHelper.from_string(int, "1")

    def test_list_names(self):
        assert EnumHelper.list_names(TransportKind) == ["AUTO", "VIRTUAL", "OLA"]
        assert EnumHelper.list_names(AnimationModel, lowercase=True) == ["lognormal", "drift"]

    def test_to_enum(self):
        assert EnumHelper.to_enum(AnimationModel, AnimationModel.DRIFT) is AnimationModel.DRIFT
        assert EnumHelper.to_enum(AnimationModel, "lognormal") is AnimationModel.LOGNORMAL
        with pytest.raises(TypeError):
            EnumHelper.to_enum(AnimationModel, 3)
