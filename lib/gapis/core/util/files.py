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
"""File system helpers for generated sources and logs."""

import os
import shutil
import tempfile

from gapis.core import exceptions


class Error(exceptions.Error):
  """Errors for the files module."""


class MissingFileError(Error):
  """A file to read does not exist."""


def MakeDir(path, mode=0o777):
  """Creates path and its parents unless path is already a directory.

  Args:
    path: str, The directory to create.
    mode: int, The permissions of created directories.

  Raises:
    Error: A file is in the way or access is denied.
    OSError: Any other failure.
  """
  if os.path.isdir(path):
    return
  if os.path.exists(path):
    raise Error('Could not create directory [{0}]: a file exists at that '
                'location.'.format(path))
  try:
    os.makedirs(path, mode=mode, exist_ok=True)
  except PermissionError:
    raise Error('Could not create directory [{0}]: permission denied. Check '
                'that you can write to its parent directory.'.format(path))


def RmTree(path):
  """Deletes the directory tree at path, if there is one."""
  if os.path.isdir(path):
    shutil.rmtree(path)


class TemporaryDirectory(object):
  """A directory deleted, with its contents, when the with block ends.

  Attributes:
    path: str, The directory, None once closed.
  """

  def __init__(self):
    self.path = tempfile.mkdtemp()

  def __enter__(self):
    return self.path

  def __exit__(self, exc_type, exc_value, traceback):
    self.Close()
    return False

  def Close(self):
    """Deletes the directory, returns False when it was already closed."""
    if not self.path:
      return False
    RmTree(self.path)
    self.path = None
    return True


def ReadFileContents(path):
  """Reads a UTF-8 text file.

  Args:
    path: str, The file to read.

  Raises:
    MissingFileError: path is not a file.
    Error: path cannot be read.

  Returns:
    str, The file contents.
  """
  if not os.path.isfile(path):
    raise MissingFileError('File [{0}] does not exist'.format(path))
  try:
    with open(path, encoding='utf-8') as f:
      return f.read()
  except OSError as e:
    raise Error('Unable to read file [{0}]: {1}'.format(path, e))


def FileWriter(path, create_path=True):
  """Opens path for writing UTF-8 text with \\n line endings.

  Args:
    path: str, The file to write.
    create_path: bool, Create the missing parent directories of path.

  Raises:
    RequiresAdminRightsError: Access to path is denied.
    OSError: path cannot be opened.

  Returns:
    A text file object, to be used in a with statement.
  """
  parent = os.path.dirname(path)
  if create_path and parent:
    MakeDir(parent)
  try:
    return open(path, 'w', encoding='utf-8', newline='\n')
  except OSError as e:
    exceptions.HandlePermissionError(path, e)


def WriteFileContents(path, contents, create_path=True):
  """Writes contents to path, replacing the file.

  Args:
    path: str, The file to write.
    contents: str, The text to write.
    create_path: bool, Create the missing parent directories of path.
  """
  with FileWriter(path, create_path=create_path) as f:
    f.write(contents)
