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
"""Base class for generated API clients.

A generated client subclasses BaseApiClient and describes each of its
endpoints with an ApiMethodInfo. Calling an endpoint expands the path template,
adds the query parameters, encodes the request message as JSON, sends the
request through a requests.Session and decodes the JSON response into the
response message.
"""

import datetime
import re
import urllib.parse

from apitools.base.protorpclite import messages
from gapis.api_lib.util import encoding
from gapis.api_lib.util import exceptions as api_exceptions
from gapis.core import exceptions
from gapis.core import log
from gapis.core import properties
from gapis.core import requests
from gapis.core.credentials import requests as creds_requests


# {+name} is a reserved expansion, {name} a simple one.
_TEMPLATE_VAR_RE = re.compile(r'\{(\+?)([^}]+)\}')
# Characters reserved expansion leaves as is, on top of the unreserved ones.
# ? and # would end the path so they are still escaped.
_RESERVED_CHARS = ':/[]@!$&\'()*+,;='

_JSON_CONTENT_TYPE = 'application/json'


class Error(exceptions.Error):
  """Errors for this module."""


class InvalidUserInputError(Error):
  """The arguments of an API call are not valid."""


class ApiMethodInfo(object):
  """Describes one endpoint of an API.

  Attributes:
    method_id: str, The Discovery id, e.g. assuredworkloads.organizations.
      locations.workloads.get.
    http_method: str, GET, POST, PATCH, DELETE or PUT.
    relative_path: str, The path template relative to the client url, e.g.
      v1/{+name}.
    ordered_params: [str], Required parameters in call order.
    path_params: [str], Parameters substituted into relative_path.
    query_params: [str], Wire names of the optional query parameters.
    request_type_name: str, Name of the request body message, or None.
    response_type_name: str, Name of the response message, or None.
    description: str, What the endpoint does.
  """

  def __init__(self, method_id, http_method, relative_path,
               ordered_params=None, path_params=None, query_params=None,
               request_type_name=None, response_type_name=None,
               description=''):
    self.method_id = method_id
    self.http_method = http_method
    self.relative_path = relative_path
    self.ordered_params = list(ordered_params or [])
    self.path_params = list(path_params or [])
    self.query_params = list(query_params or [])
    self.request_type_name = request_type_name
    self.response_type_name = response_type_name
    self.description = description

  def __eq__(self, other):
    return isinstance(other, ApiMethodInfo) and vars(self) == vars(other)

  def __ne__(self, other):
    return not self == other

  def __repr__(self):
    return 'ApiMethodInfo({0} {1} {2})'.format(
        self.http_method, self.relative_path, self.method_id)


def FormatParam(value):
  """Returns the string form of a path or query parameter value."""
  if isinstance(value, bool):
    return 'true' if value else 'false'
  if isinstance(value, datetime.datetime):
    return encoding.EncodeDateTime(value)
  if isinstance(value, bytes):
    return encoding.EncodeBytes(value)
  if isinstance(value, messages.Enum):
    return value.name
  return str(value)


def ExpandRelativePath(relative_path, path_params):
  """Substitutes path_params into the relative_path template.

  Args:
    relative_path: str, The template, e.g. v1/{+name}/workloads.
    path_params: {str: value}, The values by template variable name.

  Returns:
    str, The expanded path.

  Raises:
    InvalidUserInputError: If a template variable has no value.
  """
  def _Expand(match):
    reserved, name = match.groups()
    value = path_params.get(name)
    if value is None:
      raise InvalidUserInputError(
          'Request missing required parameter [{0}]'.format(name))
    safe = _RESERVED_CHARS if reserved else ''
    return urllib.parse.quote(FormatParam(value), safe=safe)
  return _TEMPLATE_VAR_RE.sub(_Expand, relative_path)


class BaseApiClient(object):
  """Base class for client libraries."""
  MESSAGES_MODULE = None
  BASE_URL = ''
  MTLS_BASE_URL = ''
  _PACKAGE = ''
  _SCOPES = []
  _VERSION = ''
  _CLIENT_CLASS_NAME = ''

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Creates a client.

    Args:
      url: str, The endpoint to send requests to. Defaults to BASE_URL.
      credentials: google.auth.credentials.Credentials, Used to authorize
        requests instead of the default credentials.
      get_credentials: bool, Whether to load default credentials when none
        are given. If False, requests are sent unauthenticated.
      session: requests.Session, Sends the requests. When given, it is used
        as is and no credentials are attached to it.
      additional_http_headers: {str: str}, Headers added to every request.
      default_global_params: {str: str}, Query parameters added to every
        request.
      check_response_func: f(response), Called with every requests.Response
        before its status is checked.
    """
    url = url or self.BASE_URL
    if url and not url.endswith('/'):
      url += '/'
    self.url = url
    self._credentials = credentials
    self._get_credentials = get_credentials
    self._session = session
    self.additional_http_headers = dict(additional_http_headers or {})
    self.global_params = dict(default_global_params or {})
    self.check_response_func = check_response_func
    self._method_configs = {}

  @property
  def session(self):
    """The requests.Session, created on first use."""
    if self._session is None:
      use_credentials = self._credentials is not None or (
          self._get_credentials and
          not properties.VALUES.auth.disable_credentials.GetBool())
      if use_credentials:
        self._session = creds_requests.GetSession(
            credentials=self._credentials, scopes=self._SCOPES)
      else:
        self._session = requests.GetSession()
    return self._session

  @session.setter
  def session(self, value):
    self._session = value

  def AddGlobalParam(self, name, value):
    """Adds a query parameter sent with every request of this client."""
    self.global_params[name] = value

  def GetMethodConfig(self, method):
    """Returns the ApiMethodInfo of the named method."""
    return self._method_configs[method]

  def GetMethodsList(self):
    return sorted(self._method_configs)

  def _GetMessageType(self, name):
    if not name:
      return None
    return getattr(self.MESSAGES_MODULE, name)

  def GetRequestType(self, method):
    return self._GetMessageType(self.GetMethodConfig(method).request_type_name)

  def GetResponseType(self, method):
    return self._GetMessageType(
        self.GetMethodConfig(method).response_type_name)

  def PrepareHttpRequest(self, method_config, path_params, query_params=None,
                         request=None):
    """Builds the url, headers and body of a call.

    Args:
      method_config: ApiMethodInfo, The endpoint.
      path_params: {str: value}, Values of the path template variables.
      query_params: {str: value}, Query parameters by wire name. Parameters
        whose value is None are left out.
      request: messages.Message, The request body, if the endpoint takes one.

    Returns:
      (str, {str: str}, str), The url, the headers and the body or None.

    Raises:
      InvalidUserInputError: If a path parameter is missing or request has the
        wrong type.
    """
    url = self.url + ExpandRelativePath(method_config.relative_path,
                                        path_params or {})

    params = []
    query_params = query_params or {}
    for name in method_config.query_params:
      value = query_params.get(name)
      if value is None:
        continue
      if isinstance(value, (list, tuple)):
        params.extend((name, FormatParam(v)) for v in value)
      else:
        params.append((name, FormatParam(value)))
    for name, value in self.global_params.items():
      if value is not None:
        params.append((name, FormatParam(value)))
    if params:
      url += '?' + urllib.parse.urlencode(params)

    headers = {'Accept': _JSON_CONTENT_TYPE}
    headers.update(self.additional_http_headers)

    body = None
    if request is not None:
      request_type = self._GetMessageType(method_config.request_type_name)
      if request_type is None:
        raise InvalidUserInputError(
            'Method [{0}] does not take a request body'.format(
                method_config.method_id))
      if not isinstance(request, request_type):
        raise InvalidUserInputError(
            'Request for [{0}] must be a [{1}], got [{2}]'.format(
                method_config.method_id, request_type.__name__,
                type(request).__name__))
      body = encoding.MessageToJson(request)
      headers['Content-Type'] = _JSON_CONTENT_TYPE
    return url, headers, body

  def _RunMethod(self, method_config, path_params, query_params=None,
                 request=None):
    """Calls an endpoint and returns its decoded response.

    Args:
      method_config: ApiMethodInfo, The endpoint.
      path_params: {str: value}, Values of the path template variables.
      query_params: {str: value}, Query parameters by wire name.
      request: messages.Message, The request body, if the endpoint takes one.

    Returns:
      The response message, or None if the endpoint has no response type.

    Raises:
      InvalidUserInputError: If the arguments are not valid.
      apitools.base.py.exceptions.HttpError: If the response status is not
        2xx.
    """
    url, headers, body = self.PrepareHttpRequest(
        method_config, path_params, query_params=query_params,
        request=request)
    log.debug('Calling [%s]: %s %s', method_config.method_id,
              method_config.http_method, url)
    response = self.session.request(
        method_config.http_method, url, data=body, headers=headers)
    return self.ProcessHttpResponse(method_config, response)

  def ProcessHttpResponse(self, method_config, response):
    """Checks the status of a requests.Response and decodes its body."""
    if self.check_response_func is not None:
      self.check_response_func(response)
    if not 200 <= response.status_code < 300:
      info = dict(response.headers)
      info['status'] = str(response.status_code)
      info['reason'] = getattr(response, 'reason', '') or ''
      raise api_exceptions.HttpError(
          info, response.content, getattr(response, 'url', None))
    response_type = self._GetMessageType(method_config.response_type_name)
    if response_type is None:
      return None
    return encoding.JsonToMessage(response_type, response.content)
