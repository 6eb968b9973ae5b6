"""
Small helpers shared by the encoder and the units.
"""
from __future__ import annotations

from typing import Optional


def exception_to_string(exception: BaseException, default: Optional[str] = None) -> str:
    """
    Describe an exception in a log message. The description is the longest string argument of
    the exception. If it has none, `default` is returned; without a default, this falls back to
    `str(exception)` and finally to the name of the exception class.
    """
    texts = [arg.strip() for arg in exception.args if isinstance(arg, str)]
    if texts:
        return max(texts, key=len)
    if default is None:
        default = str(exception) or exception.__class__.__name__
    return default


def count_leading(data, value: int = 0) -> int:
    """
    Count the number of items at the start of `data` that are equal to `value`.
    """
    count = 0
    for item in data:
        if item != value:
            break
        count += 1
    return count
