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
"""Tests for the files module."""

import os

from gapis.core.util import files
from gapis.tests.lib import test_case


class FilesTest(test_case.Base):

  def testWriteCreatesDirectories(self):
    path = os.path.join(self.temp_path, 'a', 'b', 'pears.txt')
    files.WriteFileContents(path, 'ripe\n')
    self.assertEqual('ripe\n', files.ReadFileContents(path))

  def testWriteWithoutCreatePath(self):
    path = os.path.join(self.temp_path, 'missing', 'pears.txt')
    with self.assertRaises(OSError):
      files.WriteFileContents(path, 'ripe', create_path=False)

  def testReadMissingFile(self):
    with self.assertRaisesRegex(files.MissingFileError, 'does not exist'):
      files.ReadFileContents(os.path.join(self.temp_path, 'nope'))

  def testFileWriter(self):
    path = os.path.join(self.temp_path, 'out', 'pears.txt')
    with files.FileWriter(path) as writer:
      writer.write('one\n')
      writer.write('two\n')
    self.assertEqual('one\ntwo\n', files.ReadFileContents(path))

  def testMakeDirExisting(self):
    path = os.path.join(self.temp_path, 'dir')
    files.MakeDir(path)
    files.MakeDir(path)
    self.assertTrue(os.path.isdir(path))

  def testMakeDirOverFile(self):
    path = self.Touch(self.temp_path, 'pears.txt')
    with self.assertRaises(files.Error):
      files.MakeDir(path)

  def testTemporaryDirectory(self):
    with files.TemporaryDirectory() as temp_dir:
      self.Touch(temp_dir, 'pears.txt', 'ripe')
      self.assertTrue(os.path.isdir(temp_dir))
    self.assertFalse(os.path.exists(temp_dir))

  def testRmTree(self):
    path = os.path.join(self.temp_path, 'tree')
    self.Touch(path, 'pears.txt')
    files.RmTree(path)
    self.assertFalse(os.path.exists(path))
