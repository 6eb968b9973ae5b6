"""
Type aliases for the values that flow through alphabase. They only exist for type hints and are
replaced by `Any` at runtime.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Callable, Iterable, Self, Union

    buf = Union[bytes, bytearray, memoryview]
    """
    Binary data that supports the buffer protocol; units produce and consume these.
    """
    isq = Union[buf, Iterable[int]]
    """
    Any sequence of byte values that can be encoded.
    """

else:
    buf = isq = Callable = Iterable = Self = Any


__all__ = ['buf', 'isq', 'Callable', 'Iterable', 'Self']
