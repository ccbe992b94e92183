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
"""Unauthenticated requests.Session objects configured from properties."""

from urllib import parse

from gapis.core import log
from gapis.core import properties
from gapis.core import transport
import requests

_UNSET = 'unset'


def GetSession(timeout=_UNSET, ca_certs=None, session=None):
  """Returns a requests.Session running the default transport handlers.

  Use gapis.core.credentials.requests.GetSession() for an authorized session.

  Args:
    timeout: float, Seconds to wait on the socket, None to wait forever. The
      default comes from core/http_timeout.
    ca_certs: str, A CA bundle. core/custom_ca_certs_file takes precedence.
    session: requests.Session, The session to configure instead of a new one.

  Returns:
    requests.Session, The configured session.
  """
  if timeout == _UNSET:
    timeout = transport.GetDefaultTimeout()
  no_validation = bool(properties.VALUES.auth.disable_ssl_validation.GetBool())
  ca_certs = properties.VALUES.core.custom_ca_certs_file.Get() or ca_certs
  session = Session(timeout=timeout,
                    ca_certs=None if no_validation else ca_certs,
                    disable_ssl_certificate_validation=no_validation,
                    session=session)
  return transport.WrapRequest(session, transport.DefaultHandlers(), Request,
                               Response.FromResponse)


def Session(timeout=None, ca_certs=None,
            disable_ssl_certificate_validation=False, session=None):
  """Returns a requests.Session that applies timeout to every request.

  Args:
    timeout: float, The default request timeout in seconds.
    ca_certs: str, A CA bundle to verify TLS connections with.
    disable_ssl_certificate_validation: bool, Skip TLS verification.
    session: requests.Session, The session to configure instead of a new one.
  """
  session = session or requests.Session()
  send = session.request

  def RequestWithTimeout(*args, **kwargs):
    kwargs.setdefault('timeout', timeout)
    return send(*args, **kwargs)

  session.request = RequestWithTimeout
  if disable_ssl_certificate_validation:
    log.warning('SSL certificate validation is disabled.')
    session.verify = False
  elif ca_certs:
    session.verify = ca_certs
  return session


def _MergeParams(url, params):
  """Returns url with params appended to its query string."""
  if not params:
    return url
  split = parse.urlsplit(url)
  query = parse.parse_qsl(split.query, keep_blank_values=True)
  for name, value in (params.items() if isinstance(params, dict) else params):
    values = value if isinstance(value, (list, tuple)) else [value]
    query.extend((name, v) for v in values)
  return parse.urlunsplit(split._replace(query=parse.urlencode(query)))


class Request(transport.Request):
  """A transport.Request built from requests.Session.request arguments.

  Query params are folded into the URI. ToRequestArgs() returns
  (method, uri) and the headers, data and other keyword arguments.
  """

  def __init__(self, method, url, params=None, data=None, headers=None,
               **kwargs):
    super(Request, self).__init__(_MergeParams(url, params), method,
                                  dict(headers or {}), data)
    self._extra_kwargs = kwargs

  def ToRequestArgs(self):
    kwargs = dict(self._extra_kwargs, headers=self.headers)
    if self.body:
      kwargs['data'] = self.body
    return (self.method, self.uri), kwargs


class Response(transport.Response):

  @classmethod
  def FromResponse(cls, response):
    return cls(response.status_code, response.headers, response.content)
