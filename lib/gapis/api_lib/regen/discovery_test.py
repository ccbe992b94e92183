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
"""Tests for the discovery module."""

import os

from gapis.api_lib.regen import discovery
from gapis.tests.lib import test_case


_TESTDATA = os.path.join(os.path.dirname(__file__), 'testdata')


class DiscoveryDocTest(test_case.Base):

  def SetUp(self):
    self.doc = discovery.DiscoveryDoc.FromJson(
        os.path.join(_TESTDATA, 'fruits_v1.json'))

  def testDocumentAttributes(self):
    self.assertEqual('fruits', self.doc.api_name)
    self.assertEqual('v1', self.doc.api_version)
    self.assertEqual('Fruit Basket API', self.doc.title)
    self.assertEqual('https://cloud.google.com/fruits', self.doc.docs_url)
    self.assertEqual('https://fruits.googleapis.com/', self.doc.base_url)
    self.assertEqual('https://fruits.mtls.googleapis.com/',
                     self.doc.mtls_base_url)
    self.assertEqual(['https://www.googleapis.com/auth/cloud-platform',
                      'https://www.googleapis.com/auth/fruits.readonly'],
                     self.doc.scopes)
    self.assertEqual(['$.xgafv', 'alt', 'key'],
                     sorted(self.doc.parameters))

  def testMethodsAreFlattenedDepthFirst(self):
    self.assertEqual([
        'fruits.projects.baskets.create',
        'fruits.projects.baskets.delete',
        'fruits.projects.baskets.get',
        'fruits.projects.baskets.list',
        'fruits.projects.baskets.weigh',
        'fruits.projects.baskets.fruits.import',
        'fruits.projects.baskets.fruits.list',
    ], [m.method_id for m in self.doc.methods])

  def testMethod(self):
    method = self.doc.methods[3]
    self.assertEqual(['projects', 'baskets'], method.resource_path)
    self.assertEqual('list', method.name)
    self.assertEqual('GET', method.http_method)
    self.assertEqual('v1/{+parent}/baskets', method.path)
    self.assertEqual('v1/projects/{projectsId}/baskets', method.flat_path)
    self.assertEqual(['parent'], method.ordered_params)
    self.assertEqual(['parent'], method.path_params)
    self.assertEqual(
        ['includeEmpty', 'pageSize', 'pageToken', 'ripeAfter', 'tags'],
        sorted(method.query_params))
    self.assertIsNone(method.request_ref)
    self.assertEqual('ListBasketsResponse', method.response_ref)

  def testRequestAndResponse(self):
    weigh = self.doc.methods[4]
    self.assertEqual('WeighRequest', weigh.request_ref)
    self.assertEqual('WeighResponse', weigh.response_ref)
    self.assertEqual(['projectId', 'basketId'], weigh.ordered_params)
    self.assertEqual(['projectId', 'basketId'], weigh.path_params)
    self.assertEqual([], weigh.query_params)

  def testValidate(self):
    self.doc.Validate()

  def testBaseUrlFromRootUrl(self):
    doc = discovery.DiscoveryDoc.FromDict({
        'name': 'pear', 'version': 'v1',
        'rootUrl': 'https://www.googleapis.com/', 'servicePath': 'pear/v1/'})
    self.assertEqual('https://www.googleapis.com/pear/v1/', doc.base_url)
    self.assertEqual('', doc.mtls_base_url)
    self.assertEqual([], doc.scopes)
    self.assertEqual([], doc.methods)


class MethodTest(test_case.Base):

  def testPathParamsMissingFromParameterOrder(self):
    method = discovery.Method(['things'], 'move', {
        'id': 'pear.things.move',
        'path': 'v1/{thing}/{+target}',
        'parameters': {
            'target': {'type': 'string', 'location': 'path'},
            'thing': {'type': 'string', 'location': 'path'},
            'force': {'type': 'boolean', 'location': 'query'},
        },
        'parameterOrder': ['thing'],
    })
    self.assertEqual(['thing', 'target'], method.ordered_params)
    self.assertEqual(['thing', 'target'], method.path_params)
    self.assertEqual(['force'], method.query_params)
    self.assertEqual('GET', method.http_method)
    self.assertEqual('v1/{thing}/{+target}', method.flat_path)


class ValidateTest(test_case.Base):

  def testUnknownSchemaRef(self):
    doc = discovery.DiscoveryDoc.FromDict({
        'name': 'pear', 'version': 'v1',
        'schemas': {
            'Pear': {'type': 'object', 'properties': {
                'seeds': {'type': 'array', 'items': {'$ref': 'Seed'}}}},
        },
    })
    with self.assertRaisesRegex(discovery.UnsupportedDiscoveryDoc,
                                r'Schema \[Pear\] refers to unknown schema '
                                r'\[Seed\]'):
      doc.Validate()

  def testUnknownMethodRef(self):
    doc = discovery.DiscoveryDoc.FromDict({
        'name': 'pear', 'version': 'v1',
        'methods': {'get': {'id': 'pear.get', 'response': {'$ref': 'Pear'}}},
    })
    with self.assertRaisesRegex(discovery.UnsupportedDiscoveryDoc,
                                r'Method \[pear.get\] refers to unknown '
                                r'schema \[Pear\]'):
      doc.Validate()

  def testInvalidJson(self):
    path = self.Touch(self.temp_path, 'broken.json', '{"name": ')
    with self.assertRaisesRegex(discovery.UnsupportedDiscoveryDoc,
                                'is not valid JSON'):
      discovery.DiscoveryDoc.FromJson(path)
