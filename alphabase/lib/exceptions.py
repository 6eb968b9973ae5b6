"""
Exceptions used by alphabase. Encoding never fails, so the only domain specific errors are those
that describe why a text could not be decoded as base58; see `alphabase.lib.base58.FromBase58`.
"""
from __future__ import annotations


class AlphabaseException(Exception):
    """
    This is an exception that was not generated by an external library.
    """


class AlphabaseCriticalException(AlphabaseException):
    """
    If this exception is thrown, processing of the entire input stream
    is aborted instead of just aborting the processing of the current
    chunk.
    """


class FromBase58Error(AlphabaseException, ValueError):
    """
    Errors that can occur when decoding a base58 encoded string.
    """


class InvalidBase58Character(FromBase58Error):
    """
    The input contained a character which is not a part of the base58 alphabet.
    """
    def __init__(self, character: str, position: int):
        super().__init__(F'invalid base58 character {character!r} at position {position}')
        self.character = character
        self.position = position


class InvalidBase58Length(FromBase58Error):
    """
    The input had a length that cannot correspond to any byte sequence.
    """
    def __init__(self, msg: str = 'invalid base58 length'):
        super().__init__(msg)
