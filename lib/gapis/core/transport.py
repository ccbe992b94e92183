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
"""Request and response hooks shared by every gapis HTTP session.

A session's request method is replaced by one that runs a list of Handlers.
Each handler's request hook may change the outgoing Request and returns data
that is handed to its response hook together with the Response.
"""

import platform
import re
import time

import gapis
from gapis.core import log
from gapis.core import properties


TOKEN_URIS = frozenset([
    'https://accounts.google.com/o/oauth2/token',
    'https://www.googleapis.com/oauth2/v3/token',
    'https://www.googleapis.com/oauth2/v4/token',
    'https://oauth2.googleapis.com/token',
    'https://oauth2.googleapis.com/oauth2/v4/token',
])
_METADATA_TOKEN_URI = re.compile(
    r'metadata\.google\.internal/computeMetadata/[^/]+/instance/'
    r'service-accounts/[^/]+/token')

REDACTED_TOKEN = '--- Token Redacted ---'
_TOKEN_BODY_REDACTED = 'Body redacted: Contains oauth token.'

DEFAULT_TIMEOUT = 300


class Request(object):
  """An outgoing HTTP request that handlers may modify.

  Attributes:
    uri: str, The full URL, query string included.
    method: str, The HTTP method.
    headers: {str: str}, The request headers.
    body: str or bytes, The request body, None for none.
  """

  def __init__(self, uri, method, headers, body):
    self.uri = uri
    self.method = method
    self.headers = headers
    self.body = body


class Response(object):
  """The parts of an HTTP response that handlers look at."""

  def __init__(self, status_code, headers, body):
    self.status_code = status_code
    self.headers = headers
    self.body = body


class Handler(object):
  """A request hook and an optional response hook.

  Attributes:
    request: f(Request) -> data, Runs before the request is sent.
    response: f(Response, data), Runs after the response arrives.
  """

  def __init__(self, request, response=None):
    self.request = request
    self.response = response


def WrapRequest(http_client, handlers, make_request, make_response):
  """Routes http_client.request through handlers.

  Args:
    http_client: The client whose request method is replaced.
    handlers: [Handler], Run in order around every request.
    make_request: f(*args, **kwargs) -> Request, Builds a Request from the
      arguments of http_client.request. The Request's ToRequestArgs() gives
      them back.
    make_response: f(response) -> Response, Adapts the client's response.

  Returns:
    http_client.
  """
  send = http_client.request

  def WrappedRequest(*args, **kwargs):
    request = make_request(*args, **kwargs)
    data = [handler.request(request) for handler in handlers]
    request_args, request_kwargs = request.ToRequestArgs()
    response = send(*request_args, **request_kwargs)
    wrapped = None
    for handler, handler_data in zip(handlers, data):
      if handler.response:
        wrapped = wrapped or make_response(response)
        handler.response(wrapped, handler_data)
    return response

  http_client.request = WrappedRequest
  return http_client


def DefaultHandlers():
  """Returns the handlers every gapis session runs, based on properties."""
  handlers = [Handler(AppendToHeader('User-Agent', MakeUserAgentString()))]
  quota_project = properties.VALUES.billing.quota_project.Get()
  if quota_project:
    handlers.append(Handler(SetHeader('X-Goog-User-Project', quota_project)))
  if properties.VALUES.core.log_http.GetBool():
    handlers.append(Handler(
        LogRequest(properties.VALUES.core.log_http_redact_token.GetBool()),
        LogResponse))
  return handlers


def _HeaderKey(headers, name):
  """Returns the key of headers that matches name in any case, or name."""
  for key in headers:
    if key.lower() == name.lower():
      return key
  return name


def AppendToHeader(name, value):
  """Returns a request hook appending value to the name header."""

  def Append(request):
    key = _HeaderKey(request.headers, name)
    request.headers[key] = ' '.join(
        v for v in (request.headers.get(key), value) if v)

  return Append


def SetHeader(name, value):
  """Returns a request hook that replaces the name header with value."""

  def Set(request):
    request.headers.pop(_HeaderKey(request.headers, name), None)
    request.headers[name] = value

  return Set


def _Text(body):
  if isinstance(body, bytes):
    return body.decode('utf-8', 'replace')
  return body or ''


def LogRequest(redact_token=True):
  """Returns a request hook printing the request to the status stream.

  Args:
    redact_token: bool, Hide the Authorization header and token request
      bodies.
  """

  def Log(request):
    redact_body = redact_token and IsTokenUri(request.uri)
    lines = ['--- request ---', '{0} {1}'.format(request.method, request.uri)]
    for name, value in sorted(request.headers.items()):
      if redact_token and name.lower() == 'authorization':
        value = REDACTED_TOKEN
      lines.append('{0}: {1}'.format(name, value))
    lines.append('')
    lines.append(_TOKEN_BODY_REDACTED if redact_body else _Text(request.body))
    log.status.Print('\n'.join(lines))
    return {'start': time.time(), 'redact_body': redact_body}

  return Log


def LogResponse(response, data):
  """A response hook printing the response to the status stream."""
  lines = ['--- response {0} ({1:.3f}s) ---'.format(
      response.status_code, time.time() - data['start'])]
  for name, value in sorted(response.headers.items()):
    lines.append('{0}: {1}'.format(name, value))
  lines.append('')
  lines.append(_TOKEN_BODY_REDACTED if data['redact_body']
               else _Text(response.body))
  log.status.Print('\n'.join(lines))


def MakeUserAgentString():
  """Returns gapis/VERSION python/VERSION os/NAME plus core/user_agent."""
  parts = [
      'gapis/' + gapis.__version__,
      'python/' + platform.python_version(),
      'os/' + (platform.system().lower() or 'unknown'),
  ]
  custom = properties.VALUES.core.user_agent.Get()
  if custom:
    parts.append(custom)
  return ' '.join(parts)


def GetDefaultTimeout():
  return properties.VALUES.core.http_timeout.GetInt() or DEFAULT_TIMEOUT


def IsTokenUri(uri):
  """Returns True if uri is an OAuth2 token endpoint."""
  return uri in TOKEN_URIS or bool(_METADATA_TOKEN_URI.search(uri))
