"""
Base64 and Hexadecimal Codecs
Strict validation in front of the stdlib conversions
"""

import base64
import binascii
from typing import Union

from .base import BaseCodec
from ..errors import InvalidLengthError

# 0123456789abcdef
HEX_ALPHABET = b"0123456789abcdef"

# ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/
BASE64_ALPHABET = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789+/"
)

BASE64_PAD = b"="


class HexCodec(BaseCodec):
    """Hexadecimal: one symbol per 4 bits, high nibble first"""

    alphabet = HEX_ALPHABET
    group_size = 2

    def get_name(self) -> str:
        return "hex"

    def encode(self, data: bytes) -> bytes:
        return binascii.hexlify(bytes(data))

    def decode(self, encoded: Union[bytes, str]) -> bytes:
        """
        Decode hexadecimal symbols

        No separator stripping and no zero-prepending for odd input; both
        are errors here.
        """
        data = self._as_bytes(encoded)

        if len(data) % self.group_size != 0:
            raise InvalidLengthError(
                f"Hex input length {len(data)} is odd",
                length=len(data),
                scheme=self.get_name()
            )

        self._check_symbols(data)
        return binascii.unhexlify(data)


class Base64Codec(BaseCodec):
    """Base64: 3 bytes <-> 4 symbols of 6 bits, '=' padding on the last group"""

    alphabet = BASE64_ALPHABET
    group_size = 4

    def get_name(self) -> str:
        return "base64"

    def encode(self, data: bytes) -> bytes:
        return base64.b64encode(bytes(data))

    def decode(self, encoded: Union[bytes, str]) -> bytes:
        """
        Decode Base64 symbols

        Padding is only accepted as the last one or two symbols of the final
        group. "xx==" yields one byte and "xxx=" two, never a phantom third.
        """
        data = self._as_bytes(encoded)

        if len(data) % self.group_size != 0:
            raise InvalidLengthError(
                f"Base64 input length {len(data)} is not a multiple of {self.group_size}",
                length=len(data),
                scheme=self.get_name()
            )

        if data.endswith(BASE64_PAD * 2):
            padding = 2
        elif data.endswith(BASE64_PAD):
            padding = 1
        else:
            padding = 0

        # Any '=' left in the body is misplaced and fails the alphabet check
        self._check_symbols(data[:len(data) - padding])

        return base64.b64decode(data, validate=True)
