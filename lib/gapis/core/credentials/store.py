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
"""Loads the google-auth credentials used to authorize API requests.

Credentials are looked up in this order:

1. An access token read from the file named by auth/access_token_file.
2. The service account or authorized user file named by
   auth/credential_file_override.
3. Application Default Credentials.
"""

from gapis.core import exceptions
from gapis.core import log
from gapis.core import properties
from gapis.core.util import files

import google.auth
from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests as google_auth_requests
from google.oauth2 import credentials as google_oauth2_credentials
from google.oauth2 import service_account


CLOUD_PLATFORM_SCOPE = 'https://www.googleapis.com/auth/cloud-platform'
DEFAULT_SCOPES = (CLOUD_PLATFORM_SCOPE,)

_LOGIN_HELP = (
    'Run [gcloud auth application-default login], or set the '
    'GOOGLE_APPLICATION_CREDENTIALS environment variable or the '
    'auth/credential_file_override property to a credential file.')


class Error(exceptions.Error):
  """Errors loading or refreshing credentials."""


class AuthenticationException(Error):
  """An error the user fixes by providing credentials."""

  def __init__(self, message):
    super(AuthenticationException, self).__init__(
        '{0}\n{1}'.format(message, _LOGIN_HELP))


class NoCredentialsFoundError(AuthenticationException):

  def __init__(self, error):
    super(NoCredentialsFoundError, self).__init__(
        'No Application Default Credentials: {0}'.format(error))


class TokenRefreshError(AuthenticationException):

  def __init__(self, error):
    super(TokenRefreshError, self).__init__(
        'Refreshing the access token failed: {0}'.format(error))


class InvalidCredentialFileError(Error):
  """A configured credential file cannot be used."""

  def __init__(self, path, error):
    super(InvalidCredentialFileError, self).__init__(
        'Cannot load credentials from [{0}]: {1}'.format(path, error))


def _Scopes(scopes):
  """Returns auth/scopes when set, else scopes or DEFAULT_SCOPES."""
  override = properties.VALUES.auth.scopes.Get()
  if override:
    return tuple(s.strip() for s in override.split(',') if s.strip())
  return tuple(scopes or DEFAULT_SCOPES)


def _FromAccessTokenFile(path):
  log.info('Using the access token in [%s].', path)
  try:
    token = files.ReadFileContents(path).strip()
  except files.Error as e:
    raise InvalidCredentialFileError(path, e)
  return google_oauth2_credentials.Credentials(token)


def _FromCredentialFile(path, scopes):
  log.info('Using the credentials in [%s].', path)
  try:
    credentials, _ = google.auth.load_credentials_from_file(path,
                                                            scopes=scopes)
  except google_auth_exceptions.DefaultCredentialsError as e:
    raise InvalidCredentialFileError(path, e)
  return credentials


def _FromApplicationDefault(scopes):
  try:
    credentials, _ = google.auth.default(scopes=scopes)
  except google_auth_exceptions.DefaultCredentialsError as e:
    raise NoCredentialsFoundError(e)
  log.debug('Using Application Default Credentials.')
  return credentials


def Load(scopes=None):
  """Returns the credentials to authorize API requests with.

  Args:
    scopes: (str,), The scopes to request, DEFAULT_SCOPES by default. The
      auth/scopes property replaces them.

  Raises:
    InvalidCredentialFileError: A configured credential file cannot be used.
    NoCredentialsFoundError: Nothing is configured and there are no
      Application Default Credentials.

  Returns:
    google.auth.credentials.Credentials, The credentials.
  """
  scopes = _Scopes(scopes)
  token_file = properties.VALUES.auth.access_token_file.Get()
  if token_file:
    return _FromAccessTokenFile(token_file)
  credential_file = properties.VALUES.auth.credential_file_override.Get()
  if credential_file:
    return _FromCredentialFile(credential_file, scopes)
  return _FromApplicationDefault(scopes)


def LoadIfValid(scopes=None):
  """Like Load(), but returns None when no credentials can be loaded."""
  try:
    return Load(scopes=scopes)
  except Error:
    return None


def FromServiceAccountInfo(info, scopes=None):
  """Returns service account credentials from a parsed JSON key."""
  try:
    return service_account.Credentials.from_service_account_info(
        info, scopes=_Scopes(scopes))
  except (KeyError, ValueError) as e:
    raise InvalidCredentialFileError('<service account info>', e)


def Refresh(credentials, http_client=None):
  """Fetches a new access token for credentials.

  Args:
    credentials: google.auth.credentials.Credentials, The credentials.
    http_client: requests.Session, Sends the token request.

  Raises:
    TokenRefreshError: The token cannot be refreshed.
  """
  try:
    credentials.refresh(google_auth_requests.Request(http_client))
  except google_auth_exceptions.RefreshError as e:
    raise TokenRefreshError(e)
