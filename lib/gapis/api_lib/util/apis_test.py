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
"""Tests for the apis module."""

import copy
import os

from gapis.api_lib.util import apis
from gapis.api_lib.util import apis_util
from gapis.core import properties
from gapis.generated_clients.apis import apis_map
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_client
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages
from gapis.tests.lib import test_case


class ApisTest(test_case.Base):

  def SetUp(self):
    saved_map = dict(
        (name, dict((v, copy.copy(d)) for v, d in versions.items()))
        for name, versions in apis_map.MAP.items())
    self.addCleanup(self._RestoreMap, saved_map)

  def _RestoreMap(self, saved_map):
    apis_map.MAP.clear()
    apis_map.MAP.update(saved_map)

  def testGetApiNames(self):
    self.assertIn('assuredworkloads', apis.GetApiNames())

  def testGetVersions(self):
    self.assertEqual(['v1'], apis.GetVersions('assuredworkloads'))
    with self.assertRaises(apis_util.UnknownAPIError):
      apis.GetVersions('fruits')

  def testAlias(self):
    self.assertEqual(['v1'], apis.GetVersions('assured_workloads'))

  def testResolveVersion(self):
    self.assertEqual('v1', apis.ResolveVersion('assuredworkloads'))
    self.assertEqual('v2', apis.ResolveVersion('assuredworkloads', 'v2'))
    os.environ['GAPIS_API_CLIENT_OVERRIDES_ASSUREDWORKLOADS'] = 'v1beta1'
    self.assertEqual('v1beta1', apis.ResolveVersion('assuredworkloads', 'v2'))

  def testGetApiDef(self):
    api_def = apis.GetApiDef('assuredworkloads', 'v1')
    self.assertTrue(api_def.default_version)
    self.assertEqual('https://assuredworkloads.googleapis.com/',
                     api_def.base_url)
    with self.assertRaises(apis_util.UnknownVersionError):
      apis.GetApiDef('assuredworkloads', 'v9')

  def testConstructApiDef(self):
    api_def = apis.ConstructApiDef('assuredworkloads', 'v1', True)
    self.assertEqual(
        'gapis.generated_clients.apis.assuredworkloads.v1.'
        'assuredworkloads_v1_client.AssuredworkloadsV1',
        api_def.client_full_classpath)
    self.assertEqual(
        'gapis.generated_clients.apis.assuredworkloads.v1.'
        'assuredworkloads_v1_messages',
        api_def.messages_full_modulepath)

  def testGetClientClassAndMessages(self):
    self.assertIs(assuredworkloads_v1_client.AssuredworkloadsV1,
                  apis.GetClientClass('assuredworkloads', 'v1'))
    self.assertIs(assuredworkloads_v1_messages,
                  apis.GetMessagesModule('assuredworkloads', 'v1'))

  def testGetClientInstance(self):
    client = apis.GetClientInstance('assuredworkloads', 'v1', no_http=True)
    self.assertIsInstance(client, assuredworkloads_v1_client.AssuredworkloadsV1)
    self.assertEqual('https://assuredworkloads.googleapis.com/', client.url)
    self.assertEqual({}, client.global_params)

  def testGetClientInstanceEndpointOverride(self):
    properties.VALUES.api_endpoint_overrides.Property('assuredworkloads').Set(
        'http://localhost:8080/')
    client = apis.GetClientInstance('assuredworkloads', 'v1', no_http=True)
    self.assertEqual('http://localhost:8080/', client.url)

  def testGetClientInstanceApiKey(self):
    properties.VALUES.core.api_key.Set('my-key')
    client = apis.GetClientInstance('assuredworkloads', 'v1', no_http=True)
    self.assertEqual({'key': 'my-key'}, client.global_params)
    self.assertEqual('apikey',
                     client.additional_http_headers['X-Goog-Project-Override'])

  def testAddToApisMapAndSetDefault(self):
    apis.AddToApisMap('assuredworkloads', 'v1beta1')
    self.assertFalse(apis.GetApiDef('assuredworkloads', 'v1beta1')
                     .default_version)
    apis.SetDefaultVersion('assuredworkloads', 'v1beta1')
    self.assertEqual('v1beta1', apis.ResolveVersion('assuredworkloads'))
    self.assertFalse(apis.GetApiDef('assuredworkloads', 'v1').default_version)
    apis.SetDefaultVersion('assuredworkloads', 'v1')

  def testAddNewApi(self):
    apis.AddToApisMap('fruits', 'v1', base_pkg='fruitgen')
    self.assertTrue(apis.GetApiDef('fruits', 'v1').default_version)
    self.assertEqual('fruitgen.fruits.v1.fruits_v1_client.FruitsV1',
                     apis.GetApiDef('fruits', 'v1').client_full_classpath)
