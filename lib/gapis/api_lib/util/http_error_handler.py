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
"""A decorator that reports HttpErrors as STATUS: message HttpExceptions."""

import functools
import inspect
import json

from apitools.base.py import exceptions as apitools_exceptions

from gapis.api_lib.util import exceptions


def GetHttpErrorMessage(error):
  """Returns STATUS: message for an HttpError.

  Falls back to whichever of the two the error body has, and to HTTPError
  CODE when it has neither.

  Args:
    error: HttpError, The error response.

  Returns:
    str, The message.
  """
  code = (error.response or {}).get('status', '')
  body = error.content
  if isinstance(body, bytes):
    body = body.decode('utf-8', 'replace')
  try:
    content = json.loads(body)
  except (TypeError, ValueError):
    content = None
  if isinstance(content, dict) and isinstance(content.get('error'), dict):
    code = content['error'].get('code', code)
    found = [content['error'].get('status', ''),
             content['error'].get('message', '')]
  else:
    found = ['', body or '']
  found = [part for part in found if part]
  if not found:
    return 'HTTPError {0}'.format(code)
  return ': '.join(found)


def _RaiseHttpException(error):
  message = GetHttpErrorMessage(error)
  template = message.replace('{', '{{').replace('}', '}}')
  raise exceptions.HttpException(error, template) from error


def HandleHttpErrors(func):
  """Wraps a function or generator function to raise HttpExceptions.

  Args:
    func: The function to wrap.

  Raises:
    TypeError: func is not a function or method.

  Returns:
    The wrapped function.
  """
  if not (inspect.isfunction(func) or inspect.ismethod(func)):
    raise TypeError(
        'HandleHttpErrors only wraps functions and methods, not [{0}].'.format(
            func))

  if inspect.isgeneratorfunction(func):

    @functools.wraps(func)
    def GeneratorWrapper(*args, **kwargs):
      try:
        yield from func(*args, **kwargs)
      except apitools_exceptions.HttpError as error:
        _RaiseHttpException(error)

    return GeneratorWrapper

  @functools.wraps(func)
  def Wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except apitools_exceptions.HttpError as error:
      _RaiseHttpException(error)

  return Wrapper
