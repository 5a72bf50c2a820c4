"""
Tests for the single-byte solver, key-length estimator and repeating-key breaker
"""

import pytest

from xorscope.core.config import BreakerConfig
from xorscope.core.errors import InsufficientDataError
from xorscope.core.xor_breaker import (
    XORBreaker, ScoredCandidate, NO_CANDIDATE, hamming_distance, transpose
)

from conftest import SINGLE_BYTE_HEX, SINGLE_BYTE_PLAINTEXT


@pytest.fixture
def breaker():
    return XORBreaker()


# ---------- Hamming distance ----------

def test_hamming_distance_known_vector():
    assert hamming_distance(b"this is a test", b"wokka wokka!!!") == 37


def test_hamming_distance_identical():
    assert hamming_distance(b"abc", b"abc") == 0


def test_hamming_distance_penalizes_length_mismatch():
    assert hamming_distance(b"ab", b"abcd") == 16
    assert hamming_distance(b"abcd", b"ab") == 16
    assert hamming_distance(b"", b"\x00") == 8


# ---------- Transposition ----------

def test_transpose_with_short_last_block():
    assert transpose(b"abcdefg", 3) == [b"adg", b"be", b"cf"]


def test_transpose_single_column():
    assert transpose(b"abc", 1) == [b"abc"]


def test_transpose_rejects_zero_length():
    with pytest.raises(ValueError):
        transpose(b"abc", 0)


# ---------- Single-byte solver ----------

def test_solve_single_byte_known_vector(breaker):
    result = breaker.solve_single_byte(bytes.fromhex(SINGLE_BYTE_HEX))
    assert result.key == 88
    assert result.text == SINGLE_BYTE_PLAINTEXT
    assert result.found
    assert 0.0 < result.score <= 1.0


def test_solve_single_byte_degenerate_input(breaker):
    result = breaker.solve_single_byte(b"")
    assert result == NO_CANDIDATE
    assert result == ScoredCandidate(key=0, score=0.0, text="")
    assert not result.found


def test_solve_single_byte_never_picks_zero_key(breaker):
    # Plain English: key 0 would be perfect but is excluded
    result = breaker.solve_single_byte(b"the rain in spain stays mainly in the plain")
    assert result.key != 0


def test_rank_single_byte(breaker):
    ranked = breaker.rank_single_byte(bytes.fromhex(SINGLE_BYTE_HEX), top_n=3)
    assert len(ranked) == 3
    assert ranked[0].key == 88
    assert ranked[0].score >= ranked[1].score >= ranked[2].score


def test_case_swapped_keys_tie_and_lower_key_wins(breaker):
    # Keys 0x4b and 0x6b decrypt to "eeeeetttt" and "EEEEETTTT"; case folding
    # gives both the same profile and no other key can beat two exact ranks
    ciphertext = bytes(b ^ 0x4b for b in b"eeeeetttt")

    result = breaker.solve_single_byte(ciphertext)
    assert result.key == 0x4b
    assert result.text == "eeeeetttt"
    assert result.score == pytest.approx(2 / 27)

    ranked = breaker.rank_single_byte(ciphertext, top_n=3)
    assert [c.key for c in ranked[:2]] == [0x4b, 0x6b]
    assert ranked[0].score == ranked[1].score
    assert ranked[1].text == "EEEEETTTT"
    assert ranked[2].score < ranked[1].score


# ---------- Key-length estimator ----------

def test_estimate_key_lengths_orders_ties_by_length(breaker):
    ciphertext = b"abc" * 30
    candidates = breaker.estimate_key_lengths(ciphertext)
    assert [c.length for c in candidates] == [3, 6, 9, 12, 15]
    assert all(c.score == 0.0 for c in candidates)


def test_estimate_key_lengths_ascending_scores(breaker, ice_ciphertext):
    candidates = breaker.estimate_key_lengths(ice_ciphertext)
    assert len(candidates) == 5
    scores = [c.score for c in candidates]
    assert scores == sorted(scores)


def test_estimate_key_lengths_custom_range(breaker):
    candidates = breaker.estimate_key_lengths(b"abcd" * 10, min_length=2, max_length=8, count=2)
    assert [c.length for c in candidates] == [4, 8]


def test_estimate_key_lengths_fewer_lengths_than_count(breaker):
    candidates = breaker.estimate_key_lengths(b"x" * 10, min_length=1, max_length=3)
    assert [c.length for c in candidates] == [1, 2, 3]


def test_estimate_key_lengths_needs_two_blocks(breaker):
    with pytest.raises(InsufficientDataError) as exc:
        breaker.estimate_key_lengths(b"x" * 79)
    assert exc.value.required == 80
    assert exc.value.length == 79

    assert len(breaker.estimate_key_lengths(b"x" * 80)) == 5


@pytest.mark.parametrize("min_length, max_length", [(0, 10), (5, 4)])
def test_estimate_key_lengths_invalid_range(breaker, min_length, max_length):
    with pytest.raises(ValueError):
        breaker.estimate_key_lengths(b"x" * 100, min_length=min_length, max_length=max_length)


def test_estimate_key_lengths_uses_config():
    breaker = XORBreaker(BreakerConfig(max_key_length=6, key_length_candidates=2))
    candidates = breaker.estimate_key_lengths(b"abc" * 4)
    assert [c.length for c in candidates] == [3, 6]


# ---------- Repeating-key breaker ----------

def test_break_with_known_key_length(breaker, ice_ciphertext, english_text):
    result = breaker.break_with_key_length(ice_ciphertext, 3)
    assert result.key == b"ICE"
    assert result.plaintext == english_text.decode('ascii')
    assert len(result.column_scores) == 3
    assert result.distance is None


def test_break_repeating_key_xor_explicit_lengths(breaker, ice_ciphertext):
    results = breaker.break_repeating_key_xor(ice_ciphertext, key_lengths=[3, 5])
    assert [r.key_length for r in results] == [3, 5]
    assert results[0].key == b"ICE"
    assert len(results[1].key) == 5


def test_break_repeating_key_xor_follows_estimator_order(breaker, ice_ciphertext):
    estimated = breaker.estimate_key_lengths(ice_ciphertext)
    results = breaker.break_repeating_key_xor(ice_ciphertext)

    assert [r.key_length for r in results] == [c.length for c in estimated]
    assert [r.distance for r in results] == [c.score for c in estimated]
    for r in results:
        assert len(r.key) == r.key_length


def test_threaded_columns_match_sequential(ice_ciphertext):
    sequential = XORBreaker(BreakerConfig(workers=1)).break_with_key_length(ice_ciphertext, 7)
    threaded = XORBreaker(BreakerConfig(workers=4)).break_with_key_length(ice_ciphertext, 7)
    assert threaded == sequential


def test_break_result_to_dict(breaker, ice_ciphertext):
    data = breaker.break_with_key_length(ice_ciphertext, 3).to_dict()
    assert data['key_length'] == 3
    assert data['key_hex'] == "494345"
    assert data['key_text'] == "ICE"
    assert data['plaintext'].startswith("It was the best of times")
