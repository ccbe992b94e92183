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
"""Tests for the credentialed requests.Session."""

from unittest import mock

from gapis.core.credentials import requests as creds_requests
from gapis.core.credentials import store
from gapis.tests.lib import test_case

from google.auth import credentials as google_auth_credentials
from google.auth import exceptions as google_auth_exceptions


class GetSessionTest(test_case.Base):

  def SetUp(self):
    self.creds = mock.Mock(spec=google_auth_credentials.Credentials)

    def BeforeRequest(unused_request, unused_method, unused_url, headers):
      headers['Authorization'] = 'Bearer ya29.token'
    self.creds.before_request.side_effect = BeforeRequest

    self.raw_session = self.MakeSession(self.MakeResponse({}))
    self.raw_request = self.raw_session.request

  def testAuthorizesRequests(self):
    session = creds_requests.GetSession(credentials=self.creds,
                                        session=self.raw_session)
    session.request('GET', 'https://fruits.googleapis.com/v1/x',
                    headers={'Accept': 'application/json'})

    self.raw_request.assert_called_once()
    args, kwargs = self.raw_request.call_args
    self.assertEqual(('GET', 'https://fruits.googleapis.com/v1/x'), args)
    self.assertEqual('Bearer ya29.token', kwargs['headers']['Authorization'])
    self.assertEqual('application/json', kwargs['headers']['Accept'])
    self.assertTrue(kwargs['headers']['User-Agent'].startswith('gapis/'))
    self.assertEqual(300, kwargs['timeout'])

  def testRefreshError(self):
    self.creds.before_request.side_effect = (
        google_auth_exceptions.RefreshError('revoked'))
    session = creds_requests.GetSession(credentials=self.creds,
                                        session=self.raw_session)
    with self.assertRaisesRegex(store.TokenRefreshError,
                                'revoked'):
      session.request('GET', 'https://fruits.googleapis.com/v1/x')
    self.raw_request.assert_not_called()

  def testLoadsCredentials(self):
    load = self.StartPatch('gapis.core.credentials.store.Load',
                           return_value=self.creds)
    creds_requests.GetSession(scopes=('scope',), session=self.raw_session)
    load.assert_called_once_with(scopes=('scope',))

  def testUnsupportedCredentials(self):
    with self.assertRaises(creds_requests.UnsupportedCredentialsException):
      creds_requests.GetSession(credentials=object())
