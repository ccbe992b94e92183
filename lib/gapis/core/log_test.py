# -*- coding: utf-8 -*- #
# Copyright 2024 Google LLC. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the log module."""

import datetime
import logging
import os

from gapis.core import log
from gapis.core import properties
from gapis.tests.lib import test_case


class LogTest(test_case.Base):

  def testDefaultVerbosity(self):
    self.assertEqual(logging.WARNING, log.GetVerbosity())
    self.assertEqual('warning', log.GetVerbosityName())
    log.info('hidden')
    log.warning('shown')
    self.assertNotIn('hidden', self.GetErr())
    self.assertIn('WARNING: shown', self.GetErr())

  def testSetVerbosity(self):
    old = log.SetVerbosity(logging.DEBUG)
    self.assertEqual(logging.WARNING, old)
    log.debug('now shown')
    self.assertIn('DEBUG: now shown', self.GetErr())

  def testVerbosityProperty(self):
    properties.VALUES.core.verbosity.Set('error')
    log.Reset(self.stdout, self.stderr)
    self.assertEqual(logging.ERROR, log.GetVerbosity())
    log.warning('hidden')
    self.assertEqual('', self.GetErr())

  def testOrderedVerbosityNames(self):
    self.assertEqual(['debug', 'info', 'warning', 'error', 'critical', 'none'],
                     log.OrderedVerbosityNames())

  def testPrint(self):
    log.Print('hello', 'world')
    self.assertEqual('hello world\n', self.GetOutput())

  def testUserOutputDisabled(self):
    log.SetUserOutputEnabled(False)
    self.assertFalse(log.IsUserOutputEnabled())
    log.Print('hidden')
    log.status.Print('hidden too')
    self.assertEqual('', self.GetOutput())
    self.assertEqual('', self.GetErr())

  def testFileLogging(self):
    logs_dir = os.path.join(self.temp_path, 'logs')
    log.AddFileLogging(logs_dir)
    log.debug('to the file only')
    log.out.Print('user output')
    log_file = log.GetLogFilePath()
    self.assertTrue(log_file.startswith(logs_dir))
    with open(log_file) as f:
      contents = f.read()
    self.assertIn('to the file only', contents)
    self.assertIn('user output', contents)
    self.assertNotIn('to the file only', self.GetErr())

  def testOldLogDirectoriesAreRemoved(self):
    logs_dir = os.path.join(self.temp_path, 'logs')
    old_day = datetime.datetime.now() - datetime.timedelta(days=40)
    old_dir = os.path.join(logs_dir, old_day.strftime(log.DAY_DIR_FORMAT))
    old_file = self.Touch(old_dir, '01.02.03.000000.log', 'old')
    past = (datetime.datetime.now() - datetime.timedelta(days=40)).timestamp()
    os.utime(old_file, (past, past))
    log.AddFileLogging(logs_dir)
    self.assertFalse(os.path.exists(old_dir))
    self.assertIsNotNone(log.GetLogFilePath())
