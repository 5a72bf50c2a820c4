"""
Shared fixtures for the Xorscope test suite
"""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


ENGLISH_TEXT = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season of "
    "Darkness, it was the spring of hope, it was the winter of despair, we had "
    "everything before us, we had nothing before us, we were all going direct "
    "to Heaven, we were all going direct the other way - in short, the period "
    "was so far like the present period, that some of its noisiest authorities "
    "insisted on its being received, for good or for evil, in the superlative "
    "degree of comparison only."
)

SINGLE_BYTE_HEX = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"
SINGLE_BYTE_PLAINTEXT = "Cooking MC's like a pound of bacon"


@pytest.fixture
def english_text() -> bytes:
    return ENGLISH_TEXT.encode('ascii')


@pytest.fixture
def ice_ciphertext(english_text) -> bytes:
    """English text under the 3-byte repeating key "ICE"."""
    from xorscope.core.xor_transform import xor_repeating
    return xor_repeating(english_text, b"ICE")
