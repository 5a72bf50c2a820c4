"""
Base Codec Interface
Defines the abstract interface all byte codecs must implement
"""

from abc import ABC, abstractmethod
from typing import Union

from ..errors import InvalidSymbolError


class BaseCodec(ABC):
    """Abstract base class for binary <-> text codecs"""

    # Symbols in value order; index in the table is the encoded value
    alphabet: bytes = b""

    # Number of encoded symbols that form one complete group
    group_size: int = 1

    def __init__(self):
        self.symbols = frozenset(self.alphabet)

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """
        Encode a binary buffer

        Args:
            data: Raw bytes

        Returns:
            ASCII symbols of this scheme
        """
        pass

    @abstractmethod
    def decode(self, encoded: Union[bytes, str]) -> bytes:
        """
        Decode encoded symbols back to a binary buffer

        Args:
            encoded: Symbols of this scheme (bytes or str)

        Returns:
            Decoded raw bytes

        Raises:
            InvalidSymbolError: symbol outside the alphabet
            InvalidLengthError: length not a whole number of groups
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get the name of this codec

        Returns:
            Human-readable name (e.g., "hex", "base64")
        """
        pass

    def _check_symbols(self, data: bytes):
        """Raise on the first byte that is not in the alphabet"""
        for position, symbol in enumerate(data):
            if symbol not in self.symbols:
                raise InvalidSymbolError(symbol, position, self.get_name())

    @staticmethod
    def _as_bytes(encoded: Union[bytes, str]) -> bytes:
        if isinstance(encoded, str):
            return encoded.encode('utf-8')
        return bytes(encoded)
