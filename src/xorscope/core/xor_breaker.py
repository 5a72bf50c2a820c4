"""
Repeating-key XOR breaker using normalized Hamming distance and frequency ranks
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import BreakerConfig
from .errors import InsufficientDataError
from .scoring import score_text
from .xor_transform import xor_single, xor_repeating

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyLengthCandidate:
    """Estimated key length; lower score means more probable"""
    length: int
    score: float


@dataclass(frozen=True)
class ScoredCandidate:
    """Single-byte XOR guess; higher score means more English-like"""
    key: int
    score: float
    text: str

    @property
    def found(self) -> bool:
        """False for the zero-score placeholder returned when nothing scored"""
        return self.score > 0.0


@dataclass(frozen=True)
class BreakResult:
    """Recovered key and plaintext for one candidate key length"""
    key_length: int
    key: bytes
    plaintext: str
    distance: Optional[float] = None
    column_scores: Tuple[float, ...] = field(default_factory=tuple)

    @property
    def score(self) -> float:
        """Normality of the whole decrypted text (for display, not selection)"""
        return score_text(self.plaintext)

    def to_dict(self) -> dict:
        return {
            'key_length': self.key_length,
            'key_hex': self.key.hex(),
            'key_text': self.key.decode('latin-1'),
            'plaintext': self.plaintext,
            'distance': self.distance,
            'column_scores': list(self.column_scores),
            'score': self.score
        }


NO_CANDIDATE = ScoredCandidate(key=0, score=0.0, text="")


def hamming_distance(bytes1: bytes, bytes2: bytes) -> int:
    """
    Count differing bits between two byte strings

    Only the overlapping range is compared bit by bit; every byte one input
    has beyond the other counts as 8 differing bits.
    """
    dist = 0
    for b1, b2 in zip(bytes1, bytes2):
        dist += bin(b1 ^ b2).count('1')
    return dist + 8 * abs(len(bytes1) - len(bytes2))


def transpose(ciphertext: bytes, key_length: int) -> List[bytes]:
    """
    Regroup ciphertext by key position

    Column j holds byte j of every key_length-sized block that has one, so
    each column was XORed with a single key byte.
    """
    if key_length < 1:
        raise ValueError(f"key_length must be >= 1, got {key_length}")
    return [ciphertext[pos::key_length] for pos in range(key_length)]


def _decode_text(data: bytes) -> str:
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return ""


class XORBreaker:
    """Break single-byte and repeating-key XOR using frequency analysis"""

    def __init__(self, config: Optional[BreakerConfig] = None):
        self.config = config or BreakerConfig()

    def _score_keys(self, ciphertext: bytes):
        """Yield (key, score, text) for every non-zero key byte in order"""
        # Key 0 leaves the ciphertext untouched and is never informative
        for key in range(1, 256):
            text = _decode_text(xor_single(ciphertext, key))
            yield key, score_text(text), text

    def solve_single_byte(self, ciphertext: bytes) -> ScoredCandidate:
        """
        Break single-byte XOR, return the best ScoredCandidate

        The first key reaching the strictly greatest score wins. When no key
        scores above zero the NO_CANDIDATE placeholder comes back.
        """
        best = NO_CANDIDATE

        for key, score, text in self._score_keys(ciphertext):
            if score > best.score:
                best = ScoredCandidate(key=key, score=score, text=text)

        if not best.found:
            logger.debug("No key improved on the baseline for %d bytes", len(ciphertext))
        return best

    def rank_single_byte(self, ciphertext: bytes, top_n: int = 5) -> List[ScoredCandidate]:
        """Return the top_n scoring keys, best first (ties in key order)"""
        results = [
            ScoredCandidate(key=key, score=score, text=text)
            for key, score, text in self._score_keys(ciphertext)
            if score > 0.0
        ]
        results.sort(key=lambda c: c.score, reverse=True)
        return results[:top_n]

    def estimate_key_lengths(self, ciphertext: bytes,
                             min_length: Optional[int] = None,
                             max_length: Optional[int] = None,
                             count: Optional[int] = None) -> List[KeyLengthCandidate]:
        """
        Guess probable key lengths using normalized Hamming distance

        For each length k the first two k-byte blocks are compared and the
        distance divided by k. The count lowest are returned in ascending
        order; equal scores keep the 1..max enumeration order.

        Raises:
            InsufficientDataError: ciphertext shorter than 2 * max_length
        """
        min_length = self.config.min_key_length if min_length is None else min_length
        max_length = self.config.max_key_length if max_length is None else max_length
        count = self.config.key_length_candidates if count is None else count

        if min_length < 1 or max_length < min_length:
            raise ValueError(f"Invalid key length range {min_length}..{max_length}")

        required = 2 * max_length
        if len(ciphertext) < required:
            raise InsufficientDataError(len(ciphertext), required)

        distances = []
        for keysize in range(min_length, max_length + 1):
            first = ciphertext[:keysize]
            second = ciphertext[keysize:keysize * 2]
            normalized = hamming_distance(first, second) / keysize
            logger.debug("Key length %d: normalized distance %.4f", keysize, normalized)
            distances.append(KeyLengthCandidate(length=keysize, score=normalized))

        # Sort by distance (lower is better); sort is stable
        distances.sort(key=lambda c: c.score)

        return distances[:count]

    def _solve_columns(self, columns: Sequence[bytes]) -> List[ScoredCandidate]:
        if self.config.workers > 1 and len(columns) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                # map() yields in column order regardless of completion order
                return list(executor.map(self.solve_single_byte, columns))
        return [self.solve_single_byte(column) for column in columns]

    def break_with_key_length(self, ciphertext: bytes, key_length: int,
                              distance: Optional[float] = None) -> BreakResult:
        """Transpose, solve every column, and assemble the key for one length"""
        columns = transpose(ciphertext, key_length)
        solved = self._solve_columns(columns)

        key = bytes(candidate.key for candidate in solved)
        plaintext_bytes = xor_repeating(ciphertext, key)
        plaintext = plaintext_bytes.decode('utf-8', errors='replace')

        logger.debug("Key length %d: recovered key %s", key_length, key.hex())

        return BreakResult(
            key_length=key_length,
            key=key,
            plaintext=plaintext,
            distance=distance,
            column_scores=tuple(candidate.score for candidate in solved)
        )

    def break_repeating_key_xor(self, ciphertext: bytes,
                                key_lengths: Optional[Sequence[int]] = None) -> List[BreakResult]:
        """
        Break repeating-key XOR

        Estimates key lengths (unless key_lengths is given), then for each
        length solves the transposed columns as single-byte XOR.

        Returns:
            One BreakResult per candidate length, in estimator order. Picking
            the right one is left to the caller.
        """
        if key_lengths is None:
            lengths = [(c.length, c.score) for c in self.estimate_key_lengths(ciphertext)]
        else:
            lengths = [(k, None) for k in key_lengths]

        logger.info("Trying key lengths: %s", [length for length, _ in lengths])

        return [
            self.break_with_key_length(ciphertext, length, distance)
            for length, distance in lengths
        ]
