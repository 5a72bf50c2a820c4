"""
Xorscope
Cryptanalysis toolkit for single-byte and repeating-key XOR ciphers
"""

__version__ = "1.0.0"

from .core.codecs import Scheme, decode, encode, convert
from .core.config import BreakerConfig
from .core.engine import XorscopeEngine, AnalysisResult
from .core.errors import (
    XorscopeError, InvalidSymbolError, InvalidLengthError, EmptyKeyError, InsufficientDataError
)
from .core.xor_breaker import XORBreaker, hamming_distance
from .core.xor_transform import xor_single, xor_repeating, xor_buffers
