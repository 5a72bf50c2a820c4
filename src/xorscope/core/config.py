"""
Breaker Configuration
"""

from dataclasses import dataclass, fields
from typing import Optional

from .breaker_presets import PresetLibrary


@dataclass
class BreakerConfig:
    """
    Configuration for the repeating-key XOR breaker

    Can be initialized from:
    1. Preset name: BreakerConfig(preset="wide")
    2. Custom parameters: BreakerConfig(max_key_length=12, workers=2)
    3. Preset + overrides: BreakerConfig.from_preset("short_keys", workers=2)
    """
    min_key_length: int = 1
    max_key_length: int = 40
    key_length_candidates: int = 5
    workers: int = 1

    # Preset name to load ("standard", "short_keys", "wide")
    preset: Optional[str] = None

    def __post_init__(self):
        """
        Apply preset if specified, then validate

        A preset overwrites every search field, including ones passed next
        to it. Use from_preset() to adjust a preset.
        """
        if self.preset:
            preset_obj = PresetLibrary.get_preset(self.preset)
            if not preset_obj:
                raise ValueError(f"Unknown preset: {self.preset}. Available: {PresetLibrary.list_presets()}")
            self.min_key_length = preset_obj.min_key_length
            self.max_key_length = preset_obj.max_key_length
            self.key_length_candidates = preset_obj.key_length_candidates
            self.workers = preset_obj.workers

        self.validate()

    def validate(self):
        if self.min_key_length < 1:
            raise ValueError(f"min_key_length must be >= 1, got {self.min_key_length}")
        if self.max_key_length < self.min_key_length:
            raise ValueError(
                f"max_key_length ({self.max_key_length}) is below min_key_length ({self.min_key_length})"
            )
        if self.key_length_candidates < 1:
            raise ValueError("key_length_candidates must be >= 1")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")

    @property
    def min_ciphertext_length(self) -> int:
        """Shortest ciphertext the estimator accepts with this range"""
        return 2 * self.max_key_length

    @staticmethod
    def from_preset(preset_name: str, **overrides) -> 'BreakerConfig':
        """
        Create config from preset with optional overrides

        Example:
            config = BreakerConfig.from_preset("wide", workers=8)
        """
        config = BreakerConfig(preset=preset_name)

        known = {f.name for f in fields(config)} - {"preset"}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown config option(s): {unknown}. Available: {sorted(known)}")

        for key, value in overrides.items():
            setattr(config, key, value)

        config.validate()
        return config
