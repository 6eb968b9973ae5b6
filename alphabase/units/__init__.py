"""
This package contains the alphabase units. A unit wraps one binary transformation and is written
as a subclass of `alphabase.units.Unit` which implements `alphabase.units.Unit.process`. For
example, this is all it takes to write a hex encoder:

    from alphabase import Unit

    class hex(Unit):
        def process(self, data): return data.hex().encode(self.codec)

Keyword arguments passed to the constructor of `alphabase.units.Unit` are available as the `args`
member variable of the unit.

### Pipe Syntax

Units are combined with the binary or operator `|`:

- Putting a byte string, a string, an iterable of integers, or a readable binary stream to the left
  of a unit feeds this data into it.
- Putting a unit to the right of another unit forms a pipeline.
- A pipeline can be connected to `bytes`, `bytearray` or `str` to receive the output converted to
  that type, to a literal ellipsis (`...`) to receive the raw output, to a writable binary stream
  to write the output to it, or to any other callable which is then applied to the output.

For example:

    >>> from alphabase import b58
    >>> B'abc' | b58 | str
    'ZiCa'

### Logging

A unit that was created in code is detached from its logger: nothing is logged and exceptions
raised during processing propagate to the caller. The environment variable `ALPHABASE_VERBOSITY`
can be used to attach new units to a logger instead; see `alphabase.lib.environment`. An attached
unit logs exceptions as failures and produces no output.
"""
from __future__ import annotations

import abc
import codecs
import sys

from abc import ABCMeta
from argparse import Namespace
from typing import TYPE_CHECKING, Any, cast

from alphabase.lib.environment import Logger, LogLevel, environment, logger
from alphabase.lib.exceptions import AlphabaseCriticalException, AlphabaseException
from alphabase.lib.tools import exception_to_string

if TYPE_CHECKING:
    from alphabase.lib.types import Callable, Self, buf


def _is_buffer(obj) -> bool:
    try:
        with memoryview(obj):
            return True
    except TypeError:
        return False


def _not_connectable(obj, direction: str) -> TypeError:
    return TypeError(F'Cannot connect object of type {type(obj).__name__} {direction} a unit.')


class Executable(ABCMeta):
    """
    The metaclass of all units. It provides the properties that belong to a unit class rather
    than an instance, and it lets the class stand in for an instance without arguments in a
    pipeline.
    """

    def __or__(cls, other):
        return cls().__or__(other)

    def __ror__(cls, other) -> Unit:
        return cls().__ror__(other)

    @property
    def codec(cls) -> str:
        """
        Units exchange text as `UTF8`.
        """
        return 'UTF8'

    @property
    def name(cls) -> str:
        """
        The display name of a unit: its class name without surrounding underscores, and with
        dashes in place of the remaining ones.
        """
        return cls.__name__.strip('_').replace('_', '-')

    @property
    def logger(cls) -> Logger:
        """
        The logger named after the unit. It is created on first use and is not inherited by
        subclasses.
        """
        log = cls.__dict__.get('_logger')
        if log is None:
            log = logger(cls.name)
            setattr(cls, '_logger', log)
        return log


class Unit(metaclass=Executable):
    """
    The base class for all alphabase units. It implements the pipe syntax and the logging
    facilities that are shared by all units.
    """
    args: Namespace

    _source: Unit | buf | None
    _result: buf | None

    def __init__(self, **keywords):
        self._source = None
        self._result = None
        self.args = Namespace(**keywords)
        level = environment.verbosity.value
        if level is None:
            self.log_detach()
        else:
            self.log_level = level

    @abc.abstractmethod
    def process(self, data: bytearray) -> buf | None:
        """
        Transform one chunk of input data. Returning `None` is the same as returning no data.
        """

    @property
    def codec(self) -> str:
        return type(self).codec

    @property
    def name(self) -> str:
        return type(self).name

    @property
    def logger(self) -> Logger:
        return type(self).logger

    @property
    def log_level(self) -> LogLevel:
        """
        The level of the unit logger as a `alphabase.lib.environment.LogLevel`. Assigning an
        integer interprets it as a verbosity count.
        """
        return LogLevel(self.logger.getEffectiveLevel())

    @log_level.setter
    def log_level(self, value: int | LogLevel) -> None:
        if not isinstance(value, LogLevel):
            value = LogLevel.FromVerbosity(value)
        self.logger.setLevel(value)

    def log_detach(self) -> Self:
        """
        Detach the unit from its logger, so that exceptions during processing reach the caller.
        """
        self.log_level = LogLevel.DETACHED
        return self

    def _exception_handler(self, exception: Exception, data: buf):
        if self.log_level >= LogLevel.DETACHED:
            raise exception
        if isinstance(exception, AlphabaseCriticalException):
            self.log_warn(F'critical error, terminating: {exception}')
            raise exception
        if isinstance(exception, AlphabaseException):
            self.log_fail(exception_to_string(exception))
        else:
            message = F'exception of type {exception.__class__.__name__}'
            explanation = exception_to_string(exception, '')
            if explanation:
                message += F'; {explanation}'
            if self.log_level <= LogLevel.INFO:
                message += F'; input was {len(data)} bytes'
            self.log_fail(message)
        if self.log_debug():
            import traceback
            traceback.print_exc(file=sys.stderr)

    def reset(self):
        """
        Discard the cached output of this unit and of every unit before it in the pipeline.
        """
        if isinstance(self._source, Unit):
            self._source.reset()
        self._result = None

    @property
    def source(self) -> Unit | buf | None:
        """
        The unit or buffer that this unit reads its input from.
        """
        return self._source

    @source.setter
    def source(self, stream):
        if isinstance(stream, Executable):
            stream = stream()
        if stream is not None and not isinstance(stream, Unit) and not _is_buffer(stream):
            raise _not_connectable(stream, 'to')
        self.reset()
        self._source = stream

    @property
    def nozzle(self) -> Unit:
        """
        The first unit of the pipeline that ends in this unit; input data is attached there.
        """
        unit = self
        while isinstance(unit._source, Unit):
            unit = unit._source
        return unit

    def output(self) -> buf:
        """
        Process the input data and return the result. The result is computed once for every input
        that is attached to the pipeline.
        """
        if self._result is not None:
            return self._result
        source = self._source
        if isinstance(source, Unit):
            source = source.output()
        data = bytearray(source or B'')
        try:
            result = self.process(data)
        except Exception as error:
            self._exception_handler(error, data)
            result = None
        self._result = B'' if result is None else result
        return self._result

    def __ror__(self, stream):
        if stream is None:
            return self
        if isinstance(stream, Executable):
            stream = stream()
        if isinstance(stream, str):
            stream = stream.encode(self.codec)
        elif hasattr(stream, 'read'):
            stream = stream.read()
        elif isinstance(stream, int):
            raise _not_connectable(stream, 'to')
        elif not isinstance(stream, Unit) and not _is_buffer(stream):
            stream = bytes(stream)
        self.nozzle.source = stream
        self.reset()
        return self

    def __or__(self, stream: Unit | type[Unit] | Callable[[buf], Any] | Any):
        if isinstance(stream, Executable):
            stream = stream()
        if isinstance(stream, Unit):
            return stream.__ror__(self)
        out = self.output()
        if stream is ...:
            return out
        if isinstance(stream, type):
            if isinstance(out, stream):
                return out
            if issubclass(stream, str):
                return codecs.decode(out, self.codec)
        elif hasattr(stream, 'write'):
            if not stream.writable():
                raise ValueError('target stream is not writable')
            stream.write(out)
            stream.flush()
            return stream
        if callable(stream):
            return cast('Callable[[buf], Any]', stream)(out)
        raise _not_connectable(stream, 'from')

    def __str__(self):
        return self | str

    def __bytes__(self):
        return self | bytes

    def __call__(self, data: buf | str | None = None) -> bytes:
        return self.__ror__(B'' if data is None else data) | bytes

    @classmethod
    def _log(cls, level: LogLevel, messages) -> bool:
        enabled = cls.logger.isEnabledFor(level)
        if enabled and messages:
            cls.logger.log(level, ' '.join(cls._render(message) for message in messages))
        return enabled

    @classmethod
    def _render(cls, message) -> str:
        if callable(message):
            message = message()
        if isinstance(message, BaseException):
            return exception_to_string(message)
        if isinstance(message, str):
            return message
        if _is_buffer(message):
            return codecs.decode(bytes(message), cls.codec, errors='backslashreplace')
        return str(message)

    @classmethod
    def log_fail(cls, *messages) -> bool:
        """
        Log the messages as a failure. Like the other logging helpers, this returns whether the
        level is enabled, and callable messages are only evaluated in that case.
        """
        return cls._log(LogLevel.ERROR, messages)

    @classmethod
    def log_warn(cls, *messages) -> bool:
        return cls._log(LogLevel.WARNING, messages)

    @classmethod
    def log_debug(cls, *messages) -> bool:
        return cls._log(LogLevel.DEBUG, messages)
