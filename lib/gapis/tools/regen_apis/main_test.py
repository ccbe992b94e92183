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
"""Tests for the regen_apis tool."""

import json
import os
import sys

from gapis.api_lib.regen import discovery_fetcher
from gapis.core.util import files
from gapis.tests.lib import test_case
from gapis.tools.regen_apis import main as regen_main
from gapis.tools.regen_apis import regen
import yaml


_FRUITS_DOC = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    'api_lib', 'regen', 'testdata', 'fruits_v1.json')


def _LoadFruits():
  return json.loads(files.ReadFileContents(_FRUITS_DOC))


class RegenTestBase(test_case.Base):

  def SetUp(self):
    self.addCleanup(self._UnloadGenerated)

  def _UnloadGenerated(self):
    for name in list(sys.modules):
      if name == 'fruitgen' or name.startswith('fruitgen.'):
        del sys.modules[name]


class RegenFromConfigTest(RegenTestBase):

  def SetUp(self):
    super(RegenFromConfigTest, self).SetUp()
    self.root_dir = os.path.join(self.temp_path, 'fruitgen')
    files.MakeDir(self.root_dir)
    self.Touch(self.root_dir, 'fruits_v1.json',
               files.ReadFileContents(_FRUITS_DOC))
    self.config_file = self.Touch(self.temp_path, 'regen.yaml', yaml.safe_dump({
        'root_dir': 'fruitgen',
        'apis': {'fruits': {'v1': {'discovery_doc': 'fruits_v1.json'}}},
    }))

  def _ApisMap(self):
    namespace = {}
    exec(files.ReadFileContents(  # pylint: disable=exec-used
        os.path.join(self.root_dir, 'apis_map.py')), namespace)
    return namespace['MAP']

  def testRegenAll(self):
    self.assertEqual(0, regen_main.main([
        'regen_apis', 'config', '--config', self.config_file,
        '--base-dir', self.temp_path]))
    self.assertTrue(os.path.isfile(os.path.join(
        self.root_dir, 'fruits', 'v1', 'fruits_v1_client.py')))
    self.assertTrue(os.path.isfile(os.path.join(
        self.root_dir, 'fruits', 'v1', 'fruits_v1_messages.py')))
    fruits_v1 = self._ApisMap()['fruits']['v1']
    self.assertEqual('fruitgen.fruits.v1', fruits_v1.class_path)
    self.assertTrue(fruits_v1.default_version)

  def testRegenOneApi(self):
    generate_api = self.StartObjectPatch(regen, 'GenerateApi')
    self.assertEqual(0, regen_main.main([
        'regen_apis', '--log-level', 'DEBUG', 'config',
        '--config', self.config_file, '--base-dir', self.temp_path,
        '--api', 'fruits/v1']))
    generate_api.assert_called_once_with(
        self.temp_path, 'fruitgen', 'fruits', 'v1',
        {'discovery_doc': 'fruits_v1.json'})
    self.assertIn('fruits', self._ApisMap())

  def testVersionOverride(self):
    self.Touch(self.temp_path, 'regen.yaml', yaml.safe_dump({
        'root_dir': 'fruitgen',
        'apis': {'fruits': {'v1': {'discovery_doc': 'fruits_v1.json',
                                   'version': 'v1beta'}}},
    }))
    regen_main.main(['regen_apis', 'config', '--config', self.config_file,
                     '--base-dir', self.temp_path])
    self.assertTrue(os.path.isfile(os.path.join(
        self.root_dir, 'fruits', 'v1beta', 'fruits_v1beta_client.py')))

  def testMissingCommand(self):
    with self.assertRaises(SystemExit):
      regen_main.main(['regen_apis'])


class RegenFromDirectoryTest(RegenTestBase):

  def SetUp(self):
    super(RegenFromDirectoryTest, self).SetUp()
    self.output_dir = os.path.join(self.temp_path, 'fruitgen')
    pears = _LoadFruits()
    pears['name'] = 'pears'
    pears['version'] = 'v4.1'
    pears['title'] = 'Pears API'
    broken = {'name': 'broken', 'version': 'v1',
              'methods': {'get': {'id': 'broken.get',
                                  'response': {'$ref': 'Missing'}}}}
    directory = {'items': [
        {'name': 'fruits', 'version': 'v1',
         'discoveryRestUrl': 'https://example.com/fruits'},
        {'name': 'pears', 'version': 'v4.1',
         'discoveryRestUrl': 'https://example.com/pears'},
        {'name': 'broken', 'version': 'v1',
         'discoveryRestUrl': 'https://example.com/broken'},
        {'name': 'gone', 'version': 'v1',
         'discoveryRestUrl': 'https://example.com/gone'},
    ]}
    self.session = self.MakeSession(
        self.MakeResponse(directory),
        self.MakeResponse(_LoadFruits()),
        self.MakeResponse(pears),
        self.MakeResponse(broken),
        self.MakeResponse('Not Found', 404))

  def testGenerateFromDirectory(self):
    index_file = os.path.join(self.temp_path, 'index.html')
    generated, failures = regen.GenerateFromDirectory(
        self.output_dir, 'fruitgen', index_file=index_file,
        session=self.session)

    self.assertEqual(['fruits', 'pears'], [d.api_name for d in generated])
    [(gone, fetch_error), (broken, _)] = failures
    self.assertEqual('gone', gone.name)
    self.assertIsInstance(fetch_error, discovery_fetcher.FetchError)
    self.assertEqual('broken', broken.api_name)
    self.assertTrue(os.path.isfile(os.path.join(
        self.output_dir, 'pears', 'v4_1', 'pears_v4_1_client.py')))
    self.assertFalse(os.path.exists(os.path.join(self.output_dir, 'broken')))
    self.assertIn('Failed to generate broken v1', self.GetErr())
    self.assertIn('Skipping [gone v1]', self.GetErr())
    self.assertEqual(
        discovery_fetcher.DISCOVERY_DIRECTORY_URL,
        self.session.get.call_args_list[0][0][0])

    html = files.ReadFileContents(index_file)
    self.assertIn('fruitgen.pears.v4_1.pears_v4_1_client import Pears', html)
    self.assertNotIn('broken', html)

  def testMainDefaultsRootPackage(self):
    generate_from_directory = self.StartObjectPatch(
        regen, 'GenerateFromDirectory', return_value=([object()], []))
    self.assertEqual(0, regen_main.main([
        'regen_apis', 'directory', '--output-dir', self.output_dir + os.sep]))
    generate_from_directory.assert_called_once_with(
        self.output_dir + os.sep, 'fruitgen', index_file=None)

  def testMainFailsWhenNothingGenerated(self):
    self.StartObjectPatch(regen, 'GenerateFromDirectory',
                          return_value=([], [(object(), Exception('x'))]))
    self.assertEqual(1, regen_main.main([
        'regen_apis', 'directory', '--output-dir', self.output_dir,
        '--root-package', 'fruitgen', '--index', 'index.html']))


class ShippedConfigTest(test_case.Base):

  def testConfigNamesCommittedDocuments(self):
    config_file = os.path.join(os.path.dirname(__file__), 'regen_config.yaml')
    config = yaml.safe_load(files.ReadFileContents(config_file))
    lib_dir = os.path.dirname(os.path.dirname(os.path.dirname(
        os.path.dirname(os.path.abspath(__file__)))))
    self.assertEqual('gapis/generated_clients/apis', config['root_dir'])
    for api_name, versions in config['apis'].items():
      for api_version, api_config in versions.items():
        self.assertTrue(os.path.isfile(os.path.join(
            lib_dir, config['root_dir'], api_config['discovery_doc'])))
        self.assertTrue(os.path.isfile(os.path.join(
            lib_dir, config['root_dir'], api_name, api_version,
            '{0}_{1}_client.py'.format(api_name, api_version))))
