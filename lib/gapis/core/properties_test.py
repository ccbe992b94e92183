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
"""Tests for the properties module."""

import os
import textwrap

from gapis.core import properties
from gapis.tests.lib import test_case


class PropertiesTest(test_case.Base):

  def SetUp(self):
    self.properties_file = os.environ[properties.CONFIG_ENV_VAR]

  def _WriteProperties(self, contents):
    self.Touch(os.path.dirname(self.properties_file),
               os.path.basename(self.properties_file),
               textwrap.dedent(contents))

  def testUnset(self):
    self.assertIsNone(properties.VALUES.core.api_key.Get())

  def testDefault(self):
    self.assertEqual('30', properties.VALUES.core.max_log_days.Get())
    self.assertEqual(30, properties.VALUES.core.max_log_days.GetInt())

  def testEnvironment(self):
    os.environ['GAPIS_CORE_API_KEY'] = 'abc'
    self.assertEqual('abc', properties.VALUES.core.api_key.Get())

  def testFile(self):
    self._WriteProperties("""\
        [core]
        api_key = from-file
        """)
    self.assertEqual('from-file', properties.VALUES.core.api_key.Get())

  def testEnvironmentWinsOverFile(self):
    self._WriteProperties("""\
        [core]
        api_key = from-file
        """)
    os.environ['GAPIS_CORE_API_KEY'] = 'from-env'
    self.assertEqual('from-env', properties.VALUES.core.api_key.Get())

  def testFileWinsOverDefault(self):
    self._WriteProperties("""\
        [core]
        max_log_days = 7
        """)
    self.assertEqual(7, properties.VALUES.core.max_log_days.GetInt())

  def testSet(self):
    properties.VALUES.billing.quota_project.Set('my-project')
    self.assertEqual('my-project',
                     os.environ['GAPIS_BILLING_QUOTA_PROJECT'])
    self.assertEqual('my-project',
                     properties.VALUES.billing.quota_project.Get())
    properties.VALUES.billing.quota_project.Set(None)
    self.assertIsNone(properties.VALUES.billing.quota_project.Get())

  def testCallback(self):
    callback = lambda: 'from-callback'
    properties.VALUES.core.user_agent.AddCallback(callback)
    self.addCleanup(properties.VALUES.core.user_agent.RemoveCallback, callback)
    self.assertEqual('from-callback', properties.VALUES.core.user_agent.Get())

  def testGetBool(self):
    self.assertFalse(properties.VALUES.core.log_http.GetBool())
    self.assertIsNone(properties.VALUES.core.disable_color.GetBool())
    os.environ['GAPIS_CORE_LOG_HTTP'] = 'yes'
    self.assertTrue(properties.VALUES.core.log_http.GetBool())

  def testBoolValidation(self):
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.core.log_http.Set('maybe')

  def testChoicesValidation(self):
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.core.verbosity.Set('loud')

  def testGetIntInvalid(self):
    os.environ['GAPIS_CORE_HTTP_TIMEOUT'] = 'soon'
    with self.assertRaisesRegex(properties.InvalidValueError,
                                r'core/http_timeout'):
      properties.VALUES.core.http_timeout.GetInt()

  def testRequired(self):
    with self.assertRaisesRegex(properties.RequiredPropertyError,
                                r'GAPIS_BILLING_QUOTA_PROJECT'):
      properties.VALUES.billing.quota_project.GetOrFail()

  def testInvalidFile(self):
    self._WriteProperties("""\
        not a section
        """)
    with self.assertRaises(properties.PropertiesParseError):
      properties.VALUES.core.api_key.Get()

  def testEndpointOverride(self):
    prop = properties.VALUES.api_endpoint_overrides.Property(
        'assuredworkloads')
    self.assertIsNone(prop.Get())
    prop.Set('https://localhost:8080/')
    self.assertEqual('https://localhost:8080/', prop.Get())

  def testEndpointOverrideInvalid(self):
    prop = properties.VALUES.api_endpoint_overrides.Property(
        'assuredworkloads')
    with self.assertRaises(properties.InvalidValueError):
      prop.Set('assuredworkloads.googleapis.com')

  def testDynamicSectionAllValues(self):
    os.environ['GAPIS_API_CLIENT_OVERRIDES_FRUITS'] = 'v2'
    self._WriteProperties("""\
        [api_client_overrides]
        vegetables = v3
        """)
    self.assertEqual(
        {'fruits': 'v2', 'vegetables': 'v3'},
        properties.VALUES.api_client_overrides.AllValues())

  def testAllValues(self):
    os.environ['GAPIS_CORE_API_KEY'] = 'abc'
    values = properties.VALUES.AllValues()
    self.assertEqual('abc', values['core']['api_key'])
    self.assertNotIn('billing', values)

  def testFromString(self):
    self.assertIs(properties.VALUES.core.api_key,
                  properties.FromString('api_key'))
    self.assertIs(properties.VALUES.auth.scopes,
                  properties.FromString('auth/scopes'))
    self.assertIsNone(properties.FromString(''))

  def testUnknownProperty(self):
    with self.assertRaises(properties.NoSuchPropertyError):
      properties.FromString('core/nope')
    with self.assertRaises(properties.NoSuchPropertyError):
      properties.FromString('nope/api_key')
