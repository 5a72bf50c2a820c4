"""
Tests for breaker configuration and presets
"""

import pytest

from xorscope.core.breaker_presets import PresetLibrary
from xorscope.core.config import BreakerConfig


def test_defaults():
    config = BreakerConfig()
    assert (config.min_key_length, config.max_key_length) == (1, 40)
    assert config.key_length_candidates == 5
    assert config.workers == 1
    assert config.min_ciphertext_length == 80


def test_preset_applied():
    config = BreakerConfig(preset="short_keys")
    assert config.max_key_length == 12
    assert config.key_length_candidates == 3


def test_from_preset_with_overrides():
    config = BreakerConfig.from_preset("wide", workers=2)
    assert config.max_key_length == 64
    assert config.key_length_candidates == 8
    assert config.workers == 2


def test_unknown_preset():
    with pytest.raises(ValueError):
        BreakerConfig(preset="nope")
    with pytest.raises(ValueError):
        BreakerConfig.from_preset("nope")


@pytest.mark.parametrize("kwargs", [
    {"min_key_length": 0},
    {"min_key_length": 10, "max_key_length": 5},
    {"key_length_candidates": 0},
    {"workers": 0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        BreakerConfig(**kwargs)


def test_override_validated():
    with pytest.raises(ValueError):
        BreakerConfig.from_preset("standard", max_key_length=0)


def test_unknown_override_rejected():
    with pytest.raises(ValueError, match="worker"):
        BreakerConfig.from_preset("wide", worker=4)


def test_preset_wins_over_fields_passed_alongside():
    config = BreakerConfig(preset="short_keys", max_key_length=20)
    assert config.max_key_length == 12

    config = BreakerConfig.from_preset("short_keys", max_key_length=20)
    assert config.max_key_length == 20


def test_every_listed_preset_resolves():
    for name in PresetLibrary.list_presets():
        preset = PresetLibrary.get_preset(name)
        assert preset is not None
        assert preset.name == name
        BreakerConfig(preset=name)
