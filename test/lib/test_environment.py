#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging
import os

from unittest import mock

from alphabase.lib.environment import LogLevel, UnitLogFormatter, VerbositySetting, environment, logger
from .. import TestBase


class TestEnvironment(TestBase):

    def test_verbosity_levels(self):
        self.assertEqual(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(-7), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertEqual(LogLevel.FromVerbosity(1), LogLevel.INFO)
        self.assertEqual(LogLevel.FromVerbosity(2), LogLevel.DEBUG)
        self.assertEqual(LogLevel.FromVerbosity(9), LogLevel.DEBUG)

    def test_verbosity_from_number(self):
        for setting, level in [
            ('2', LogLevel.DEBUG),
            ('+1', LogLevel.INFO),
            (' 0 ', LogLevel.WARNING),
            ('-1', LogLevel.DETACHED),
        ]:
            with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': setting}):
                self.assertEqual(VerbositySetting('VERBOSITY').value, level, msg=setting)

    def test_verbosity_from_name(self):
        with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': 'info'}):
            self.assertEqual(VerbositySetting('VERBOSITY').value, LogLevel.INFO)
        with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': 'DETACHED'}):
            self.assertEqual(VerbositySetting('VERBOSITY').value, LogLevel.DETACHED)

    def test_verbosity_unset_or_invalid(self):
        with mock.patch.dict(os.environ, clear=True):
            self.assertIsNone(VerbositySetting('VERBOSITY').value)
        for setting in ('LOUD', '--1', '-+1', '1-', '', '   '):
            with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': setting}):
                self.assertIsNone(VerbositySetting('VERBOSITY').value, msg=setting)

    def test_invalid_verbosity_is_reported(self):
        logging.disable(logging.NOTSET)
        with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': '--1'}):
            with self.assertLogs('alphabase.lib.environment', level='WARNING') as logs:
                VerbositySetting('VERBOSITY')
        self.assertIn("ignoring ALPHABASE_VERBOSITY='--1'", logs.output[0])

    def test_refresh(self):
        setting = environment.verbosity
        backup = setting.value
        try:
            with mock.patch.dict(os.environ, {'ALPHABASE_VERBOSITY': '1'}):
                self.assertEqual(setting.refresh(), LogLevel.INFO)
            self.assertEqual(setting.key, 'ALPHABASE_VERBOSITY')
        finally:
            setting.value = backup

    def test_logger_configuration(self):
        log = logger('alphabase-test-logger')
        self.assertFalse(log.propagate)
        self.assertEqual(len(log.handlers), 1)
        self.assertIs(logger('alphabase-test-logger'), log)
        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0].formatter, UnitLogFormatter)

    def test_formatter_kinds(self):
        formatter = UnitLogFormatter()
        for level, kind in [
            (logging.CRITICAL, 'failure'),
            (logging.ERROR, 'failure'),
            (logging.WARNING, 'warning'),
            (logging.INFO, 'comment'),
            (logging.DEBUG, 'verbose'),
        ]:
            record = logging.LogRecord('b58', level, __file__, 1, 'message', None, None)
            self.assertTrue(formatter.format(record).endswith(F') {kind} in b58: message'))
