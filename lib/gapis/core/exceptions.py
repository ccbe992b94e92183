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
"""Base exceptions for the gapis package."""

import errno
import os


class Error(Exception):
  """The base of every error a user can act on.

  The regen tool prints these as a message without a stack trace and exits
  with exit_code.
  """

  def __init__(self, *args, **kwargs):
    super(Error, self).__init__(*args)
    self.exit_code = kwargs.get('exit_code', 1)


class RequiresAdminRightsError(Error):
  """The current user may not modify a path."""

  def __init__(self, path):
    super(RequiresAdminRightsError, self).__init__(
        'You do not have permission to modify [{0}].'.format(path))


def HandlePermissionError(path, exc):
  """Re-raises exc, as RequiresAdminRightsError when access to path is denied.

  Call it from an except block.

  Args:
    path: str, The path that was being accessed.
    exc: OSError, The caught error.
  """
  if isinstance(exc, PermissionError) or getattr(exc, 'errno',
                                                 None) == errno.EACCES:
    raise RequiresAdminRightsError(os.path.abspath(path)) from exc
  raise exc
