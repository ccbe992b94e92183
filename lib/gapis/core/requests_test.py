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
"""Tests for the unauthenticated requests.Session and its handlers."""

from gapis.core import properties
from gapis.core import requests
from gapis.core import transport
from gapis.tests.lib import test_case


class GetSessionTest(test_case.Base):

  def SetUp(self):
    self.raw_session = self.MakeSession(self.MakeResponse(
        '{"done": true}', headers={'Content-Type': 'application/json'}))
    self.raw_request = self.raw_session.request

  def _Request(self, *args, **kwargs):
    session = requests.GetSession(session=self.raw_session)
    return session.request(*args, **kwargs)

  def testUserAgent(self):
    properties.VALUES.core.user_agent.Set('my-tool/1.0')
    self._Request('GET', 'https://fruits.googleapis.com/v1/x',
                  headers={'user-agent': 'caller'})
    _, kwargs = self.raw_request.call_args
    user_agent = kwargs['headers']['user-agent']
    self.assertTrue(user_agent.startswith('caller gapis/'))
    self.assertTrue(user_agent.endswith(' my-tool/1.0'))

  def testQuotaProject(self):
    properties.VALUES.billing.quota_project.Set('billed-project')
    self._Request('GET', 'https://fruits.googleapis.com/v1/x')
    _, kwargs = self.raw_request.call_args
    self.assertEqual('billed-project',
                     kwargs['headers']['X-Goog-User-Project'])

  def testNoQuotaProject(self):
    self._Request('GET', 'https://fruits.googleapis.com/v1/x')
    _, kwargs = self.raw_request.call_args
    self.assertNotIn('X-Goog-User-Project', kwargs['headers'])

  def testParamsAreMergedIntoTheUrl(self):
    self._Request('GET', 'https://fruits.googleapis.com/v1/x?a=1',
                  params={'b': ['2', '3']})
    args, kwargs = self.raw_request.call_args
    self.assertEqual(('GET', 'https://fruits.googleapis.com/v1/x?a=1&b=2&b=3'),
                     args)
    self.assertNotIn('params', kwargs)

  def testTimeout(self):
    properties.VALUES.core.http_timeout.Set('12')
    self._Request('GET', 'https://fruits.googleapis.com/v1/x')
    _, kwargs = self.raw_request.call_args
    self.assertEqual(12, kwargs['timeout'])

  def testExplicitTimeoutWins(self):
    self._Request('GET', 'https://fruits.googleapis.com/v1/x', timeout=3)
    _, kwargs = self.raw_request.call_args
    self.assertEqual(3, kwargs['timeout'])

  def testCustomCaCerts(self):
    properties.VALUES.core.custom_ca_certs_file.Set('/etc/ca.pem')
    requests.GetSession(session=self.raw_session)
    self.assertEqual('/etc/ca.pem', self.raw_session.verify)

  def testDisableSslValidation(self):
    properties.VALUES.auth.disable_ssl_validation.Set('true')
    requests.GetSession(session=self.raw_session)
    self.assertFalse(self.raw_session.verify)

  def testLogHttp(self):
    properties.VALUES.core.log_http.Set('true')
    self._Request('POST', 'https://fruits.googleapis.com/v1/x',
                  data='{"a": 1}',
                  headers={'Authorization': 'Bearer secret'})
    err = self.GetErr()
    self.assertIn('--- request ---\nPOST https://fruits.googleapis.com/v1/x\n',
                  err)
    self.assertIn('Authorization: ' + transport.REDACTED_TOKEN, err)
    self.assertNotIn('secret', err)
    self.assertIn('{"a": 1}', err)
    self.assertIn('--- response 200 (', err)
    self.assertIn('{"done": true}', err)

  def testLogHttpTokenUri(self):
    properties.VALUES.core.log_http.Set('true')
    self._Request('POST', 'https://oauth2.googleapis.com/token',
                  data='refresh_token=secret')
    err = self.GetErr()
    self.assertIn('Body redacted: Contains oauth token.', err)
    self.assertNotIn('secret', err)


class TransportTest(test_case.Base):

  def testIsTokenUri(self):
    self.assertTrue(transport.IsTokenUri('https://oauth2.googleapis.com/token'))
    self.assertTrue(transport.IsTokenUri(
        'http://metadata.google.internal/computeMetadata/v1/instance/'
        'service-accounts/default/token'))
    self.assertFalse(transport.IsTokenUri('https://fruits.googleapis.com/'))

  def testSetHeaderReplacesAnyCase(self):
    request = requests.Request('GET', 'https://x/', headers={'accept': 'a'})
    transport.SetHeader('Accept', 'b')(request)
    self.assertEqual({'Accept': 'b'}, request.headers)
