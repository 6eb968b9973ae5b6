#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration of alphabase through environment variables, and the logging setup of units. There
is currently one setting: `ALPHABASE_VERBOSITY` decides whether new units are attached to a logger
and at which level they log.
"""
from __future__ import annotations

import logging
import os
import re

from enum import IntEnum
from typing import Optional

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    The log level of a unit. On top of the standard levels, a unit can be `DETACHED`: it logs
    nothing and every exception raised while processing is passed on to the caller.
    """
    DETACHED = logging.CRITICAL + 100
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET

    @classmethod
    def FromVerbosity(cls, verbosity: int) -> LogLevel:
        """
        Translate a verbosity count into a log level. A negative count detaches the unit, zero
        reports warnings, and each step above zero makes the output more detailed.
        """
        if verbosity < 0:
            return cls.DETACHED
        steps = (cls.WARNING, cls.INFO, cls.DEBUG)
        return steps[min(verbosity, len(steps) - 1)]


class UnitLogFormatter(logging.Formatter):
    """
    Renders a record as `(time) kind in unit: message`, where the kind is one of `failure`,
    `warning`, `comment` or `verbose`.
    """
    KINDS = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def __init__(self):
        super().__init__('({asctime}) {kind} in {name}: {message}', datefmt='%H:%M:%S', style='{')

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.kind = self.KINDS.get(record.levelno, record.levelname.lower())
        return super().formatMessage(record)


def logger(name: str) -> Logger:
    """
    Get the logger of the unit with the given name. Its records go to standard error through one
    handler and are not passed on to the root logger.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(UnitLogFormatter())
        log.addHandler(handler)
    log.propagate = False
    return log


class VerbositySetting:
    """
    The log level requested through the environment variable `ALPHABASE_{name}`. Its value is
    either a verbosity count like `2` or `-1`, or the name of a `LogLevel` member in any case.
    Anything else is reported as a warning and leaves the setting at `None`.
    """
    _COUNT = re.compile(r'[-+]?\d+')

    key: str
    value: Optional[LogLevel]

    def __init__(self, name: str):
        self.key = F'ALPHABASE_{name}'
        self.value = self.read()

    def read(self) -> Optional[LogLevel]:
        setting = os.environ.get(self.key, '').strip()
        if not setting:
            return None
        if self._COUNT.fullmatch(setting):
            return LogLevel.FromVerbosity(int(setting))
        try:
            return LogLevel[setting.upper()]
        except KeyError:
            choices = ', '.join(level.name for level in LogLevel)
            logger(__name__).warning(
                F'ignoring {self.key}={setting!r}; expected a number or one of: {choices}')
            return None

    def refresh(self) -> Optional[LogLevel]:
        self.value = self.read()
        return self.value


class environment:
    verbosity = VerbositySetting('VERBOSITY')
