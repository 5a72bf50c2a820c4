"""
Error Types
Exceptions raised by the codec, XOR and analysis layers

Codec and structural problems (bad symbols, bad lengths, empty keys, short
ciphertext) are precondition violations and are raised straight to the
caller. A brute-force search that finds nothing convincing is NOT an error:
the solver returns a zero-score placeholder instead.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Categories of errors that can occur."""
    CODEC_ERROR = "Codec Error"
    KEY_ERROR = "Key Error"
    ANALYSIS_ERROR = "Analysis Error"


class XorscopeError(Exception):
    """Base exception class for Xorscope errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.ANALYSIS_ERROR,
        suggestion: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.suggestion = suggestion

    def __str__(self):
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message

    def to_dict(self):
        """Serialize error for JSON responses"""
        return {
            'error': type(self).__name__,
            'category': self.category.value,
            'message': self.message,
            'suggestion': self.suggestion
        }


class InvalidSymbolError(XorscopeError, ValueError):
    """A symbol outside the scheme alphabet (or a misplaced '=' pad)."""

    def __init__(self, symbol: int, position: int, scheme: str):
        self.symbol = symbol
        self.position = position
        self.scheme = scheme
        super().__init__(
            f"Invalid {scheme} symbol {bytes([symbol])!r} at position {position}",
            category=ErrorCategory.CODEC_ERROR,
            suggestion=f"Check that the input really is {scheme}-encoded"
        )


class InvalidLengthError(XorscopeError, ValueError):
    """Encoded input (or XOR operand) has an unusable length."""

    def __init__(self, message: str, length: int, scheme: Optional[str] = None):
        self.length = length
        self.scheme = scheme
        super().__init__(message, category=ErrorCategory.CODEC_ERROR)


class EmptyKeyError(XorscopeError, ValueError):
    """Repeating-key XOR was given a zero-length key."""

    def __init__(self):
        super().__init__(
            "Repeating-key XOR requires a non-empty key",
            category=ErrorCategory.KEY_ERROR
        )


class InsufficientDataError(XorscopeError, ValueError):
    """Ciphertext is too short for the requested key-length search."""

    def __init__(self, length: int, required: int):
        self.length = length
        self.required = required
        super().__init__(
            f"Ciphertext of {length} bytes is too short; need at least {required}",
            category=ErrorCategory.ANALYSIS_ERROR,
            suggestion="Lower the maximum key length or supply more ciphertext"
        )
