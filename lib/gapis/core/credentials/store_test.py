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
"""Tests for the credentials store."""

import os
from unittest import mock

from gapis.core import properties
from gapis.core.credentials import store
from gapis.tests.lib import test_case

from google.auth import credentials as google_auth_credentials
from google.auth import exceptions as google_auth_exceptions
from google.oauth2 import credentials as google_oauth2_credentials


class LoadTest(test_case.Base):

  def SetUp(self):
    self.default = self.StartPatch('google.auth.default')
    self.load_from_file = self.StartPatch(
        'google.auth.load_credentials_from_file')
    self.creds = mock.Mock(spec=google_auth_credentials.Credentials)

  def testAccessTokenFile(self):
    token_file = self.Touch(self.temp_path, 'token', 'ya29.token\n')
    properties.VALUES.auth.access_token_file.Set(token_file)
    creds = store.Load()
    self.assertIsInstance(creds, google_oauth2_credentials.Credentials)
    self.assertEqual('ya29.token', creds.token)
    self.default.assert_not_called()

  def testAccessTokenFileMissing(self):
    properties.VALUES.auth.access_token_file.Set(
        os.path.join(self.temp_path, 'missing'))
    with self.assertRaisesRegex(store.InvalidCredentialFileError, 'missing'):
      store.Load()

  def testCredentialFileOverride(self):
    properties.VALUES.auth.credential_file_override.Set('/tmp/key.json')
    self.load_from_file.return_value = (self.creds, 'my-project')
    self.assertIs(self.creds, store.Load())
    self.load_from_file.assert_called_once_with(
        '/tmp/key.json', scopes=store.DEFAULT_SCOPES)
    self.default.assert_not_called()

  def testCredentialFileOverrideInvalid(self):
    properties.VALUES.auth.credential_file_override.Set('/tmp/key.json')
    self.load_from_file.side_effect = (
        google_auth_exceptions.DefaultCredentialsError('bad file'))
    with self.assertRaisesRegex(store.InvalidCredentialFileError,
                                r'\[/tmp/key.json\]'):
      store.Load()

  def testApplicationDefaultCredentials(self):
    self.default.return_value = (self.creds, 'my-project')
    scopes = ('https://www.googleapis.com/auth/fruits',)
    self.assertIs(self.creds, store.Load(scopes=scopes))
    self.default.assert_called_once_with(scopes=scopes)

  def testScopesProperty(self):
    self.default.return_value = (self.creds, None)
    properties.VALUES.auth.scopes.Set('scope-a, scope-b')
    store.Load(scopes=('ignored',))
    self.default.assert_called_once_with(scopes=('scope-a', 'scope-b'))

  def testNoCredentials(self):
    self.default.side_effect = google_auth_exceptions.DefaultCredentialsError(
        'nothing found')
    with self.assertRaisesRegex(store.NoCredentialsFoundError,
                                'nothing found'):
      store.Load()
    self.assertIsNone(store.LoadIfValid())


class RefreshTest(test_case.Base):

  def testRefreshError(self):
    creds = mock.Mock(spec=google_auth_credentials.Credentials)
    creds.refresh.side_effect = google_auth_exceptions.RefreshError('expired')
    with self.assertRaisesRegex(store.TokenRefreshError, 'expired'):
      store.Refresh(creds, http_client=mock.Mock())

  def testFromServiceAccountInfoInvalid(self):
    with self.assertRaises(store.InvalidCredentialFileError):
      store.FromServiceAccountInfo({'type': 'service_account'})
