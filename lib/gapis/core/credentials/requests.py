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
"""requests.Session objects authorized with google-auth credentials."""

from gapis.core import exceptions
from gapis.core import requests
from gapis.core.credentials import store

from google.auth import credentials as google_auth_credentials
from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests as google_auth_requests


class Error(exceptions.Error):
  """Errors for this module."""


class UnsupportedCredentialsException(Error):
  """The credentials are not google-auth credentials."""


def GetSession(credentials=None, scopes=None, timeout='unset', ca_certs=None,
               session=None):
  """Returns a requests.Session that authorizes every request.

  Args:
    credentials: google.auth.credentials.Credentials, The credentials to use,
      loaded with store.Load() when None.
    scopes: (str,), The scopes to load credentials with.
    timeout: float, Seconds to wait on the socket, see
      gapis.core.requests.GetSession().
    ca_certs: str, A CA bundle to verify TLS connections with.
    session: requests.Session, The session to configure instead of a new one.

  Raises:
    store.Error: The credentials cannot be loaded.
    UnsupportedCredentialsException: credentials is of an unknown type.

  Returns:
    requests.Session, The authorized session.
  """
  if credentials is None:
    credentials = store.Load(scopes=scopes)
  if not isinstance(credentials, google_auth_credentials.Credentials):
    raise UnsupportedCredentialsException(
        'Unsupported credentials type: {0}'.format(credentials))
  http_client = requests.GetSession(timeout=timeout, ca_certs=ca_certs,
                                    session=session)
  return _Authorize(http_client, credentials)


def _Authorize(http_client, credentials):
  """Adds the credentials' Authorization header to every request."""
  send = http_client.request
  # Token refreshes use a separate, unauthorized session.
  refresh_request = google_auth_requests.Request(requests.GetSession())

  def AuthorizedRequest(method, url, data=None, headers=None, **kwargs):
    headers = dict(headers or {})
    try:
      credentials.before_request(refresh_request, method, url, headers)
    except google_auth_exceptions.RefreshError as e:
      raise store.TokenRefreshError(e)
    return send(method, url, data=data, headers=headers, **kwargs)

  http_client.request = AuthorizedRequest
  return http_client
