"""
English Frequency Scoring
Rank-order comparison of a text's byte histogram against English
"""

from collections import Counter
from typing import Union

# Most frequent first; space sits between 't' and 'a'
EXPECTED_FREQUENCY_RANK = b"et aoinshrdlcumwfgypbvkjxqz"

_EXPECTED_POSITION = {byte: pos for pos, byte in enumerate(EXPECTED_FREQUENCY_RANK)}


def frequency(text: Union[str, bytes]) -> Counter:
    """
    Count byte occurrences in text

    ASCII letters are folded to lower case first. Every byte is counted,
    spaces and punctuation included.

    Args:
        text: Candidate plaintext (str is encoded as UTF-8)

    Returns:
        Counter mapping byte value -> count
    """
    if isinstance(text, str):
        text = text.encode('utf-8')
    # bytes.lower() only touches A-Z
    return Counter(bytes(text).lower())


def normality(profile: Counter) -> float:
    """
    Score how closely a profile's rank order matches English

    Entries are ranked by descending count, equal counts by ascending byte
    value. A byte at rank i found at position p of EXPECTED_FREQUENCY_RANK
    adds 1 - |p - i| / 27; bytes outside the table add nothing. The sum is
    divided by 27. A profile with more than 27 distinct bytes can push table
    bytes past rank 27, where they count against the score.

    Args:
        profile: Mapping byte value -> count (see frequency())

    Returns:
        Normality score, higher is more English-like
    """
    expected_len = len(EXPECTED_FREQUENCY_RANK)
    ranked = sorted(profile.items(), key=lambda item: (-item[1], item[0]))

    total = 0.0
    for rank, (byte, _) in enumerate(ranked):
        position = _EXPECTED_POSITION.get(byte)
        if position is None:
            continue
        total += 1.0 - abs(position - rank) / expected_len

    return total / expected_len


def score_text(text: Union[str, bytes]) -> float:
    """Shortcut for normality(frequency(text))"""
    return normality(frequency(text))
