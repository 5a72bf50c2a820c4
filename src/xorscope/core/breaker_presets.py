"""
Breaker Presets
Predefined key-length search settings for common ciphertext shapes

Instead of tuning the search range for each sample, pick the preset that
matches how long the key is likely to be.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class BreakerPreset:
    """Complete repeating-key breaker configuration preset"""
    name: str
    description: str

    # Key-length search range (inclusive)
    min_key_length: int = 1
    max_key_length: int = 40

    # How many estimated key lengths are carried into the column solve
    key_length_candidates: int = 5

    # Threads used for per-column single-byte solves
    workers: int = 1


class PresetLibrary:
    """Library of predefined breaker presets"""

    @staticmethod
    def get_preset(name: str) -> Optional[BreakerPreset]:
        """Get preset by name"""
        presets = {
            "standard": PresetLibrary.standard(),
            "short_keys": PresetLibrary.short_keys(),
            "wide": PresetLibrary.wide(),
        }
        return presets.get(name.lower())

    @staticmethod
    def list_presets() -> List[str]:
        """List all available preset names"""
        return ["standard", "short_keys", "wide"]

    @staticmethod
    def standard() -> BreakerPreset:
        """
        Standard preset: key lengths 1-40, five candidates

        Use when:
        - Nothing is known about the key
        - Ciphertext is at least 80 bytes
        """
        return BreakerPreset(
            name="standard",
            description="Key lengths 1-40, top 5 candidates",
        )

    @staticmethod
    def short_keys() -> BreakerPreset:
        """
        Short-keys preset: key lengths 1-12, three candidates

        Use when:
        - Key is a short word or a few bytes (typical malware XOR)
        - Ciphertext is too short for the standard range
        """
        return BreakerPreset(
            name="short_keys",
            description="Key lengths 1-12, top 3 candidates",
            max_key_length=12,
            key_length_candidates=3,
        )

    @staticmethod
    def wide() -> BreakerPreset:
        """
        Wide preset: key lengths 1-64, eight candidates, threaded columns

        Use when:
        - Key may be a passphrase
        - Ciphertext is long (128 bytes minimum)
        """
        return BreakerPreset(
            name="wide",
            description="Key lengths 1-64, top 8 candidates, 4 worker threads",
            max_key_length=64,
            key_length_candidates=8,
            workers=4,
        )
