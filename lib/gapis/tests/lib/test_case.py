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
"""Base class for gapis unit tests."""

import io
import json
import os
import sys
import unittest
from unittest import mock

from gapis.core import log
from gapis.core import properties
from gapis.core.util import files
import requests


class Base(unittest.TestCase):
  """Base class for all gapis tests.

  Every test runs with a clean environment: GAPIS_ environment variables are
  cleared, GAPIS_CONFIG points at a missing file in a temporary directory and
  logging is reset. Subclasses override SetUp and TearDown instead of setUp
  and tearDown.
  """

  def setUp(self):
    self._temp_dir = files.TemporaryDirectory()
    self.temp_path = self._temp_dir.path
    environ = dict((k, v) for k, v in os.environ.items()
                   if not k.startswith('GAPIS_'))
    environ[properties.CONFIG_ENV_VAR] = os.path.join(self.temp_path,
                                                      'properties')
    self.StartDictPatch(os.environ, environ, clear=True)
    self.stdout = io.StringIO()
    self.stderr = io.StringIO()
    log.Reset(self.stdout, self.stderr)
    self.addCleanup(log.Reset)
    self.addCleanup(self._temp_dir.Close)
    self.SetUp()

  def tearDown(self):
    self.TearDown()

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def StartPatch(self, *args, **kwargs):
    patcher = mock.patch(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def StartObjectPatch(self, *args, **kwargs):
    patcher = mock.patch.object(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def StartDictPatch(self, *args, **kwargs):
    patcher = mock.patch.dict(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def Touch(self, directory, name, contents=''):
    """Writes contents to directory/name and returns the path."""
    path = os.path.join(directory, name)
    files.WriteFileContents(path, contents)
    return path

  def AddSysPath(self, path):
    """Puts path first on sys.path for the duration of the test."""
    sys.path.insert(0, path)
    self.addCleanup(sys.path.remove, path)

  def GetOutput(self):
    return self.stdout.getvalue()

  def GetErr(self):
    return self.stderr.getvalue()

  def MakeResponse(self, content='', status_code=200, headers=None, url='',
                   reason='OK'):
    """Returns a requests.Response as a server would send it.

    Args:
      content: dict, str or bytes, The body. A dict is sent as JSON.
      status_code: int, The HTTP status.
      headers: {str: str}, The headers, JSON content type by default.
      url: str, The url of the request.
      reason: str, The status reason.

    Returns:
      requests.Response
    """
    if isinstance(content, (dict, list)):
      content = json.dumps(content)
    if isinstance(content, str):
      content = content.encode('utf-8')
    response = requests.Response()
    response.status_code = status_code
    response._content = content  # pylint: disable=protected-access
    response.headers.update(
        headers or {'Content-Type': 'application/json; charset=UTF-8'})
    response.url = url
    response.reason = reason
    return response

  def MakeSession(self, *responses):
    """Returns a mock requests.Session answering with responses in order."""
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = list(responses)
    session.get.side_effect = list(responses)
    return session
