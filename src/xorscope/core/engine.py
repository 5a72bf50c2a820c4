"""
Core Analysis Engine
Orchestrates codecs, XOR transforms and the breaker for end-to-end flows
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .codecs import Scheme, decode, encode, convert
from .config import BreakerConfig
from .xor_breaker import XORBreaker, BreakResult, KeyLengthCandidate, ScoredCandidate
from .xor_transform import xor_buffers, xor_repeating

logger = logging.getLogger(__name__)

Encoded = Union[bytes, str]


@dataclass
class AnalysisResult:
    """
    Complete repeating-key analysis of one ciphertext

    Holds every candidate; the engine does not decide which one is right.
    """
    # Input metadata
    input_length: int = 0
    scheme: str = "raw"

    # Estimator output, ascending distance
    candidates: List[KeyLengthCandidate] = field(default_factory=list)

    # One result per candidate length, same order
    results: List[BreakResult] = field(default_factory=list)

    def best(self) -> Optional[BreakResult]:
        """Result whose full plaintext scores highest (display convenience)"""
        if not self.results:
            return None
        return max(self.results, key=lambda r: r.score)

    def to_dict(self) -> Dict:
        """Convert all results to dictionary for JSON export"""
        return {
            'metadata': {
                'input_length': self.input_length,
                'scheme': self.scheme
            },
            'key_lengths': [
                {'length': c.length, 'distance': c.score}
                for c in self.candidates
            ],
            'results': [r.to_dict() for r in self.results]
        }


def _strip_whitespace(encoded: Encoded) -> bytes:
    if isinstance(encoded, str):
        encoded = encoded.encode('utf-8')
    # Wrapped Base64/hex dumps carry line breaks
    return b"".join(bytes(encoded).split())


def _as_bytes(value: Union[bytes, str]) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


class XorscopeEngine:
    """
    Main engine that coordinates all modules

    Workflows:
    1. convert: hex <-> Base64
    2. fixed_xor: XOR two equal-length encoded buffers
    3. solve_single_byte: recover a single-byte key
    4. encrypt: repeating-key XOR, encoded output
    5. break_ciphertext: estimate key lengths, solve columns, decrypt
    """

    def __init__(self, config: Optional[BreakerConfig] = None):
        """
        Initialize engine

        Args:
            config: Breaker configuration (defaults to the standard preset)
        """
        self.config = config or BreakerConfig()
        self.breaker = XORBreaker(config=self.config)

    def convert(self, encoded: Encoded, source: Scheme, target: Scheme) -> bytes:
        """Re-encode input from one scheme to another"""
        return convert(_strip_whitespace(encoded), source, target)

    def fixed_xor(self, lhs: Encoded, rhs: Encoded, scheme: Scheme = Scheme.HEX) -> bytes:
        """XOR two equal-length encoded buffers, return the encoded result"""
        left = decode(_strip_whitespace(lhs), scheme)
        right = decode(_strip_whitespace(rhs), scheme)
        return encode(xor_buffers(left, right), scheme)

    def encrypt(self, plaintext: Union[bytes, str], key: Union[bytes, str],
                scheme: Scheme = Scheme.HEX) -> bytes:
        """Repeating-key XOR plaintext with key, return the encoded ciphertext"""
        ciphertext = xor_repeating(_as_bytes(plaintext), _as_bytes(key))
        return encode(ciphertext, scheme)

    def solve_single_byte(self, encoded: Encoded, scheme: Scheme = Scheme.HEX) -> ScoredCandidate:
        """Decode input and brute-force its single-byte XOR key"""
        ciphertext = decode(_strip_whitespace(encoded), scheme)
        logger.info("Brute-forcing single-byte key over %d bytes", len(ciphertext))
        return self.breaker.solve_single_byte(ciphertext)

    def rank_single_byte(self, encoded: Encoded, scheme: Scheme = Scheme.HEX,
                         top_n: int = 5) -> List[ScoredCandidate]:
        """Decode input and list the top_n single-byte keys"""
        ciphertext = decode(_strip_whitespace(encoded), scheme)
        return self.breaker.rank_single_byte(ciphertext, top_n=top_n)

    def break_ciphertext(self, data: Encoded, scheme: Optional[Scheme] = Scheme.BASE64,
                         key_lengths: Optional[Sequence[int]] = None) -> AnalysisResult:
        """
        Perform complete repeating-key analysis

        Args:
            data: Encoded ciphertext, or raw bytes when scheme is None
            scheme: Encoding of data (None for raw binary)
            key_lengths: Skip estimation and try exactly these lengths

        Returns:
            AnalysisResult with one BreakResult per candidate length
        """
        if scheme is None:
            ciphertext = _as_bytes(data)
        else:
            ciphertext = decode(_strip_whitespace(data), scheme)

        result = AnalysisResult(
            input_length=len(ciphertext),
            scheme=scheme.value if scheme else "raw"
        )

        logger.info("Breaking %d bytes of ciphertext", len(ciphertext))
        result.results = self.breaker.break_repeating_key_xor(ciphertext, key_lengths=key_lengths)
        result.candidates = [
            KeyLengthCandidate(length=r.key_length, score=r.distance)
            for r in result.results
            if r.distance is not None
        ]

        logger.info("Produced %d candidate keys", len(result.results))
        return result

    def export_results(self, result: AnalysisResult, output_dir: str, base_name: str) -> Path:
        """
        Export analysis results to a JSON file

        Args:
            result: AnalysisResult to export
            output_dir: Directory to write output files
            base_name: Base name for output files

        Returns:
            Path of the written JSON file
        """
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        json_file = output_path / f"{base_name}.json"
        with open(json_file, 'w') as f:
            json.dump(result.to_dict(), f, indent=2)
        logger.info("JSON summary: %s", json_file)

        return json_file
