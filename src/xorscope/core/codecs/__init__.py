"""
Codec Package
Binary <-> text conversions for the two supported byte encodings

- base.py: BaseCodec interface
- base64_hex.py: HexCodec, Base64Codec and their symbol tables
"""

from enum import Enum
from typing import Union

from .base import BaseCodec
from .base64_hex import HexCodec, Base64Codec, HEX_ALPHABET, BASE64_ALPHABET


class Scheme(Enum):
    """Supported textual byte encodings"""
    HEX = "hex"
    BASE64 = "base64"

    @classmethod
    def from_name(cls, name: str) -> 'Scheme':
        """Parse a scheme name ("hex", "base64", "b64"), case-insensitive"""
        aliases = {
            "hex": cls.HEX,
            "base16": cls.HEX,
            "base64": cls.BASE64,
            "b64": cls.BASE64,
        }
        scheme = aliases.get(name.strip().lower())
        if scheme is None:
            raise ValueError(f"Unknown scheme: {name}. Available: hex, base64")
        return scheme


# Codecs hold no per-call state, so one instance per scheme is shared
_CODECS = {
    Scheme.HEX: HexCodec(),
    Scheme.BASE64: Base64Codec(),
}


def get_codec(scheme: Scheme) -> BaseCodec:
    """Return the codec instance for a scheme"""
    return _CODECS[scheme]


def decode(encoded: Union[bytes, str], scheme: Scheme) -> bytes:
    """Decode hex or Base64 symbols to raw bytes"""
    return get_codec(scheme).decode(encoded)


def encode(data: bytes, scheme: Scheme) -> bytes:
    """Encode raw bytes as hex or Base64 symbols"""
    return get_codec(scheme).encode(data)


def convert(encoded: Union[bytes, str], source: Scheme, target: Scheme) -> bytes:
    """Re-encode symbols from one scheme into another (e.g. hex -> Base64)"""
    return encode(decode(encoded, source), target)


__all__ = [
    'BaseCodec',
    'HexCodec',
    'Base64Codec',
    'HEX_ALPHABET',
    'BASE64_ALPHABET',
    'Scheme',
    'get_codec',
    'decode',
    'encode',
    'convert',
]
