"""
XOR Transforms
Single-byte, repeating-key and fixed (buffer against buffer) XOR
"""

from .errors import EmptyKeyError, InvalidLengthError


def xor_single(buffer: bytes, key_byte: int) -> bytes:
    """XOR every byte of buffer with the same key byte"""
    if not 0 <= key_byte <= 0xFF:
        raise ValueError(f"Key byte must be in 0..255, got {key_byte}")
    return bytes(b ^ key_byte for b in buffer)


def xor_repeating(buffer: bytes, key: bytes) -> bytes:
    """
    XOR byte i of buffer with key[i % len(key)]

    Applying the same key twice returns the original buffer, so this both
    encrypts and decrypts.

    Raises:
        EmptyKeyError: key has no bytes
    """
    if len(key) == 0:
        raise EmptyKeyError()
    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(buffer))


def xor_buffers(lhs: bytes, rhs: bytes) -> bytes:
    """XOR two equal-length buffers position by position"""
    if len(lhs) != len(rhs):
        raise InvalidLengthError(
            f"Fixed XOR needs equal-length buffers, got {len(lhs)} and {len(rhs)}",
            length=len(rhs)
        )
    return bytes(l ^ r for l, r in zip(lhs, rhs))
