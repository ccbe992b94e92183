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
"""Turns apitools HttpErrors into readable gapis exceptions.

An HttpException renders its HttpError through a small template language:

  {name}          The payload attribute name, for example {status_code}.
  {.a.b.0.c}      A value from the decoded JSON error body.
  {a.b}           The payload attribute a if set, otherwise the JSON body.
  {name?TEXT}     TEXT when name is set, else nothing. {?} in TEXT is the
                  value of name.
  {{ and }}       Literal braces.

Lists and dicts are rendered as YAML.
"""

import json
import logging

from apitools.base.py import exceptions as apitools_exceptions
from gapis.api_lib.util import resource as resource_util
from gapis.core import exceptions as core_exceptions
from gapis.core import log
import yaml


# The error raised for non-2xx responses.
HttpError = apitools_exceptions.HttpError

DEFAULT_ERROR_FORMAT = '{message}{details?\n{?}}'
DEBUG_ERROR_FORMAT = DEFAULT_ERROR_FORMAT + '{.debugInfo?\n{?}}'

_RESOURCE_DESCRIPTIONS = {
    403: 'You do not have permission to access {item} [{name}] (or it may '
         'not exist)',
    404: '{Item} [{name}] not found',
    409: '{Item} [{name}] is the subject of a conflict',
}


class TemplateError(core_exceptions.Error):
  """An error template has unbalanced braces."""


def _IsEmpty(value):
  return value is None or value == '' or value == [] or value == {}


def _Render(value):
  if isinstance(value, (str, int, float)):
    return str(value)
  return yaml.safe_dump(value, default_flow_style=False).strip()


def _Dig(value, keys):
  """Follows keys through nested dicts and lists, None when it cannot."""
  for key in keys:
    if isinstance(value, dict):
      value = value.get(key)
    elif isinstance(value, list) and key.isdigit() and int(key) < len(value):
      value = value[int(key)]
    else:
      return None
  return value


def _ClosingBrace(template, start):
  """Returns the index of the brace closing the one at start."""
  depth = 0
  for i in range(start, len(template)):
    if template[i] == '{':
      depth += 1
    elif template[i] == '}':
      depth -= 1
      if not depth:
        return i
  raise TemplateError('Unbalanced braces in [{0}].'.format(template))


class HttpErrorPayload(object):
  """The parts of an HttpError that error messages are built from.

  Attributes:
    api_name: str, The API name taken from the URL.
    api_version: str, The API version taken from the URL.
    content: dict, The decoded JSON error body.
    details: list, The typed details of the error.
    error_info: dict, content['error'].
    instance_name: str, The name of the resource the request was about.
    message: str, A generic human readable message.
    resource_item: str, The singular collection name, like workload.
    resource_name: str, The collection name, like workloads.
    status_code: int, The HTTP status code.
    status_description: str, The HTTP reason phrase.
    status_message: str, The error message from the body.
    url: str, The request URL.
  """

  def __init__(self, http_error):
    self.api_name = ''
    self.api_version = ''
    self.content = {}
    self.details = []
    self.error_info = None
    self.instance_name = ''
    self.resource_item = ''
    self.resource_name = ''
    self.status_code = 0
    self.status_description = ''
    self.status_message = ''
    self.url = ''
    if isinstance(http_error, str):
      self.message = http_error
      return
    self._ParseResponse(http_error)
    self._ParseUrl(http_error.url)
    self.message = self._GenericMessage()

  def _ParseResponse(self, http_error):
    response = http_error.response or {}
    self.status_code = int(response.get('status', 0) or 0)
    self.status_description = response.get('reason', '') or ''
    body = http_error.content
    if isinstance(body, bytes):
      body = body.decode('utf-8', 'replace')
    body = body or ''
    try:
      content = json.loads(body)
    except ValueError:
      self.status_message = body
      return
    if not isinstance(content, dict) or not isinstance(
        content.get('error'), dict):
      self.status_message = body
      return
    self.content = content
    self.error_info = content['error']
    self.status_code = self.status_code or int(self.error_info.get('code', 0))
    self.status_description = (self.status_description or
                               self.error_info.get('status', ''))
    self.status_message = self.error_info.get('message', '')
    self.details = self.error_info.get('details', [])

  def _ParseUrl(self, url):
    """Fills in the API and resource names from the request URL."""
    self.url = url or ''
    if not self.url:
      return
    try:
      api_name, api_version, path = resource_util.SplitDefaultEndpointUrl(
          self.url)
    except resource_util.InvalidEndpointException:
      return
    self.api_name = api_name or ''
    self.api_version = api_version or ''
    # Paths alternate collections and ids, the last pair names the resource:
    # organizations/1/locations/us/workloads/abc.
    segments = [s for s in path.split('/') if s]
    segments = segments[:len(segments) - len(segments) % 2]
    if not segments:
      return
    self.resource_name = segments[-2]
    self.instance_name = segments[-1].split(':')[0]
    if self.resource_name.endswith('s'):
      self.resource_item = self.resource_name[:-1]
    else:
      self.resource_item = self.resource_name

  def _GenericMessage(self):
    template = _RESOURCE_DESCRIPTIONS.get(self.status_code)
    if template and self.resource_item and self.instance_name:
      description = template.format(item=self.resource_item,
                                    Item=self.resource_item.capitalize(),
                                    name=self.instance_name)
    elif self.status_description:
      description = self.status_description.rstrip('.')
    else:
      description = 'HTTPError {0}'.format(self.status_code)
    if self.status_message:
      return '{0}: {1}'.format(description, self.status_message)
    return description

  def _Lookup(self, name):
    if not name.startswith('.') and '.' not in name:
      return getattr(self, name, None)
    keys = [k for k in name.split('.') if k]
    if not name.startswith('.') and keys:
      attribute = getattr(self, keys[0], None)
      if not _IsEmpty(attribute):
        return _Dig({keys[0]: attribute}, keys)
    return _Dig(self.content, keys)

  def Format(self, template, value=None):
    """Expands template against this payload.

    Args:
      template: str, A template in the language described by this module.
      value: The value {?} expands to.

    Raises:
      TemplateError: The template has unbalanced braces.

    Returns:
      str, The expanded template.
    """
    parts = []
    i = 0
    while i < len(template):
      if template.startswith(('{{', '}}'), i):
        parts.append(template[i])
        i += 2
        continue
      if template[i] != '{':
        parts.append(template[i])
        i += 1
        continue
      end = _ClosingBrace(template, i)
      parts.append(self._FormatField(template[i + 1:end], value))
      i = end + 1
    return ''.join(parts)

  def _FormatField(self, field, value):
    name, conditional, text = field.partition('?')
    if not name:
      return '' if _IsEmpty(value) or not conditional else _Render(value)
    found = self._Lookup(name)
    if _IsEmpty(found):
      return ''
    if conditional:
      return self.Format(text, _Render(found))
    return _Render(found)


class HttpException(core_exceptions.Error):
  """An HttpError with a readable message.

  Attributes:
    error: HttpError, The wrapped error.
    error_format: str, The message template, None for the default.
    payload: HttpErrorPayload, The parsed error.
  """

  def __init__(self, error, error_format=None):
    super(HttpException, self).__init__('')
    self.error = error
    self.error_format = error_format
    self.payload = HttpErrorPayload(error)

  def __str__(self):
    template = self.error_format
    if template is None:
      template = (DEBUG_ERROR_FORMAT if log.GetVerbosity() <= logging.DEBUG
                  else DEFAULT_ERROR_FORMAT)
    return self.payload.Format(str(template))

  @property
  def message(self):
    return str(self)

  def __eq__(self, other):
    return isinstance(other, HttpException) and self.message == other.message

  def __hash__(self):
    return hash(self.message)


def CatchHTTPErrorRaiseHTTPException(format_str=None):
  """Returns a decorator converting HttpErrors into HttpExceptions.

  Args:
    format_str: str, The HttpException message template.

  Example:
    @CatchHTTPErrorRaiseHTTPException('Error [{status_code}]')
    def Describe(client, name):
      ...
  """

  def Decorator(func):

    def Wrapper(*args, **kwargs):
      try:
        return func(*args, **kwargs)
      except apitools_exceptions.HttpError as error:
        raise HttpException(error, format_str) from error

    return Wrapper

  return Decorator
