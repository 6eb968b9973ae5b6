"""
Base58 encoding of binary data. The alphabet omits the characters `0`, `O`, `I` and `l`, which are
easily confused when written down, and the symbols `+` and `/`, which are used by base64. It is
famously used to render Bitcoin addresses. Leading zero bytes of the input are not treated as
padding: each of them is encoded as one leading `1` character.

This module only implements the alphabet level encoding. There is no checksum or version byte
framing, and the decoding direction is only specified by the `FromBase58` protocol.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from alphabase.lib.tools import count_leading

if TYPE_CHECKING:
    from alphabase.lib.types import isq

__all__ = [
    'ALPHABET',
    'FromBase58',
    'to_base58',
]

ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'

if len(ALPHABET) != 58 or len(set(ALPHABET)) != 58:
    raise RuntimeError('the base58 alphabet must consist of 58 distinct characters')

# 138/100 is a fixed point overestimate of log(256)/log(58)
_SIZE_NUMERATOR = 138
_SIZE_DENOMINATOR = 100


def work_buffer_size(length: int) -> int:
    """
    An upper bound for the number of base58 digits that are required to encode `length` bytes
    without leading zeros.
    """
    return length * _SIZE_NUMERATOR // _SIZE_DENOMINATOR + 1


def to_base58(data: isq) -> str:
    """
    Encode the given byte sequence as base58. The input is interpreted as a big endian unsigned
    integer and converted to base 58 by repeatedly multiplying a buffer of base58 digits by 256
    and adding the next input byte. This function never fails for a byte sequence; the empty
    sequence is encoded as the empty string.
    """
    if isinstance(data, (int, str)):
        raise TypeError(F'expected a byte sequence, got {type(data).__name__}')
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)

    zcount = count_leading(data)
    size = work_buffer_size(len(data) - zcount)
    buffer = bytearray(size)
    high = size - 1

    for k in range(zcount, len(data)):
        carry = data[k]
        j = size - 1
        while j > high or carry:
            carry += buffer[j] << 8
            carry, buffer[j] = divmod(carry, 58)
            if j > 0:
                j -= 1
        high = j

    j = count_leading(buffer)
    return ALPHABET[0] * zcount + ''.join(ALPHABET[digit] for digit in buffer[j:])


class FromBase58(Protocol):
    """
    The interface of a base58 decoder. This package does not implement decoding, but code that
    requires it should be written against this interface. A conforming implementation satisfies
    `decoder.from_base58(to_base58(data)) == data` for every byte sequence `data` and raises:

    - `alphabase.lib.exceptions.InvalidBase58Character` for a character that is not part of the
      alphabet; the exception records the offending character and its position.
    - `alphabase.lib.exceptions.InvalidBase58Length` when the decoder expects a fixed number of
      bytes, for example a 25 byte address, and the text decodes to a different number of bytes.
    """

    def from_base58(self, text: str) -> bytes:
        ...
