"""
The alphabase package implements the base58 encoding of binary data: Arbitrary byte sequences are
rendered as text over an alphabet of 58 characters that omits the easily confused characters `0`,
`O`, `I` and `l`. The encoding is available in two forms:

1. `alphabase.lib.base58.to_base58` is a plain function that maps a byte sequence to a string.
2. `alphabase.units.encoding.b58.b58` is a unit that can be used in pipe syntax, see
   `alphabase.units` for details.

For example:

    >>> from alphabase import b58, to_base58
    >>> to_base58(B'abc')
    'ZiCa'
    >>> B'\\0abc' | b58 | str
    '1ZiCa'

Decoding is not implemented; `alphabase.lib.base58.FromBase58` specifies the interface that a
decoder is expected to satisfy.
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'alphabase'

from alphabase.lib.base58 import ALPHABET, FromBase58, to_base58
from alphabase.lib.exceptions import (
    AlphabaseException,
    FromBase58Error,
    InvalidBase58Character,
    InvalidBase58Length,
)
from alphabase.units import Unit
from alphabase.units.encoding.b58 import b58

__all__ = [
    'ALPHABET',
    'AlphabaseException',
    'b58',
    'FromBase58',
    'FromBase58Error',
    'InvalidBase58Character',
    'InvalidBase58Length',
    'to_base58',
    'Unit',
]
