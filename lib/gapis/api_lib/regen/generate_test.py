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
"""Tests for the generate module."""

import datetime
import importlib
import inspect
import json
import os
import sys

from apitools.base.protorpclite import message_types
from apitools.base.protorpclite import messages as _messages
from apitools.base.py import extra_types
from gapis.api_lib.regen import discovery
from gapis.api_lib.regen import generate
from gapis.api_lib.regen import naming
from gapis.api_lib.util import encoding
from gapis.core.util import files
from gapis.tests.lib import test_case


_TESTDATA = os.path.join(os.path.dirname(__file__), 'testdata')
_FRUITS_DOC = os.path.join(_TESTDATA, 'fruits_v1.json')


class GeneratedFruitsTest(test_case.Base):
  """Generates the fruits api into a temporary package and imports it."""

  def SetUp(self):
    self.output_dir = os.path.join(self.temp_path, 'fruitgen')
    generate.GenerateApi(_FRUITS_DOC, self.output_dir, 'fruitgen', 'fruits',
                         'v1')
    self.AddSysPath(self.temp_path)
    self.addCleanup(self._UnloadGenerated)
    importlib.invalidate_caches()
    self.client_module = importlib.import_module(
        'fruitgen.fruits.v1.fruits_v1_client')
    self.messages = importlib.import_module(
        'fruitgen.fruits.v1.fruits_v1_messages')

  def _UnloadGenerated(self):
    for name in list(sys.modules):
      if name == 'fruitgen' or name.startswith('fruitgen.'):
        del sys.modules[name]

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return self.client_module.FruitsV1(session=self.session)

  def _LastCall(self):
    args, kwargs = self.session.request.call_args
    return args[0], args[1], kwargs

  def testPackageFiles(self):
    for path in [
        'fruitgen/__init__.py',
        'fruitgen/fruits/__init__.py',
        'fruitgen/fruits/v1/__init__.py',
        'fruitgen/fruits/v1/fruits_v1_client.py',
        'fruitgen/fruits/v1/fruits_v1_messages.py',
    ]:
      self.assertTrue(os.path.isfile(os.path.join(self.temp_path, path)),
                      path)
    init_source = files.ReadFileContents(
        os.path.join(self.output_dir, '__init__.py'))
    self.assertIn('Licensed under the Apache License', init_source)

  def testClientClass(self):
    client_class = self.client_module.FruitsV1
    self.assertIs(client_class, self.client_module.Fruits)
    self.assertEqual('https://fruits.googleapis.com/', client_class.BASE_URL)
    self.assertEqual('https://fruits.mtls.googleapis.com/',
                     client_class.MTLS_BASE_URL)
    self.assertEqual(['https://www.googleapis.com/auth/cloud-platform',
                      'https://www.googleapis.com/auth/fruits.readonly'],
                     client_class._SCOPES)
    self.assertEqual('v1', client_class._VERSION)
    self.assertIs(self.messages, client_class.MESSAGES_MODULE)

  def testMethods(self):
    client = self._Client()
    self.assertEqual([
        'ProjectsBasketsCreate',
        'ProjectsBasketsDelete',
        'ProjectsBasketsFruitsImport',
        'ProjectsBasketsFruitsList',
        'ProjectsBasketsGet',
        'ProjectsBasketsList',
        'ProjectsBasketsWeigh',
    ], client.GetMethodsList())
    for name in client.GetMethodsList():
      self.assertTrue(callable(getattr(client, name)), name)

  def testSignatures(self):
    client_class = self.client_module.FruitsV1

    def Params(name):
      return list(inspect.signature(getattr(client_class, name)).parameters)

    self.assertEqual(['self', 'parent', 'request', 'basketId'],
                     Params('ProjectsBasketsCreate'))
    self.assertEqual(['self', 'name'], Params('ProjectsBasketsDelete'))
    self.assertEqual(['self', 'parent', 'includeEmpty', 'pageSize',
                      'pageToken', 'ripeAfter', 'tags'],
                     Params('ProjectsBasketsList'))
    self.assertEqual(['self', 'projectId', 'basketId', 'request'],
                     Params('ProjectsBasketsWeigh'))
    self.assertEqual(['self', 'parent', 'from_', 'pageToken'],
                     Params('ProjectsBasketsFruitsList'))

  def testDocstring(self):
    doc = self.client_module.FruitsV1.ProjectsBasketsList.__doc__
    self.assertIn('Lists the baskets of a project.', doc)
    self.assertIn('ripeAfter: (datetime.datetime)', doc)
    self.assertIn('tags: ([str])', doc)
    self.assertIn('(ListBasketsResponse) The response message.', doc)

  def testMethodConfig(self):
    config = self._Client().GetMethodConfig('ProjectsBasketsFruitsList')
    self.assertEqual('fruits.projects.baskets.fruits.list', config.method_id)
    self.assertEqual('GET', config.http_method)
    self.assertEqual('v1/{+parent}/fruits', config.relative_path)
    self.assertEqual(['parent'], config.ordered_params)
    self.assertEqual(['from', 'pageToken'], config.query_params)
    self.assertIsNone(config.request_type_name)
    self.assertEqual('ListFruitsResponse', config.response_type_name)

  def testCreate(self):
    client = self._Client(self.MakeResponse({
        'name': 'projects/p/baskets/b',
        'createTime': '2024-05-01T12:00:00Z',
        'weightGrams': '1200',
        'class': 'wicker',
        'state': 'FRESH',
    }))
    basket = self.messages.Basket(
        displayName='Lunch',
        capacity=12,
        weightGrams=1200,
        checksum=b'\x00\x01',
        class_='wicker',
        state=self.messages.Basket.StateValueValuesEnum.FRESH,
        fruits=[self.messages.Fruit(
            kind=self.messages.Fruit.KindValueValuesEnum._1, ripe=True)],
        labels=encoding.DictToAdditionalPropertyMessage(
            {'meal': 'lunch'}, self.messages.Basket.LabelsValue))

    result = client.ProjectsBasketsCreate('projects/p', basket,
                                          basketId='b')

    method, url, kwargs = self._LastCall()
    self.assertEqual('POST', method)
    self.assertEqual(
        'https://fruits.googleapis.com/v1/projects/p/baskets?basketId=b', url)
    self.assertEqual({
        'displayName': 'Lunch',
        'capacity': 12,
        'weightGrams': '1200',
        'checksum': 'AAE=',
        'class': 'wicker',
        'state': 'FRESH',
        'fruits': [{'kind': '1', 'ripe': True}],
        'labels': {'meal': 'lunch'},
    }, json.loads(kwargs['data']))
    self.assertEqual('application/json', kwargs['headers']['Content-Type'])

    self.assertEqual('projects/p/baskets/b', result.name)
    self.assertEqual(1200, result.weightGrams)
    self.assertEqual('wicker', result.class_)
    self.assertEqual(self.messages.Basket.StateValueValuesEnum.FRESH,
                     result.state)
    self.assertEqual(
        datetime.datetime(2024, 5, 1, 12, tzinfo=datetime.timezone.utc),
        result.createTime)

  def testListQueryParams(self):
    client = self._Client(self.MakeResponse({
        'baskets': [{'name': 'projects/p/baskets/b'}],
        'nextPageToken': 'next',
    }))
    result = client.ProjectsBasketsList(
        'projects/p', includeEmpty=False, pageSize=10,
        ripeAfter=datetime.datetime(2024, 5, 1, 12,
                                    tzinfo=datetime.timezone.utc),
        tags=['red', 'green'])

    method, url, kwargs = self._LastCall()
    self.assertEqual('GET', method)
    self.assertEqual(
        'https://fruits.googleapis.com/v1/projects/p/baskets'
        '?includeEmpty=false&pageSize=10'
        '&ripeAfter=2024-05-01T12%3A00%3A00.000Z&tags=red&tags=green', url)
    self.assertIsNone(kwargs['data'])
    self.assertEqual('next', result.nextPageToken)
    self.assertEqual(['projects/p/baskets/b'],
                     [b.name for b in result.baskets])

  def testReservedQueryParamName(self):
    client = self._Client(self.MakeResponse({}))
    client.ProjectsBasketsFruitsList('projects/p/baskets/b', from_='north')
    _, url, _ = self._LastCall()
    self.assertEqual('https://fruits.googleapis.com/v1/projects/p/baskets/b/'
                     'fruits?from=north', url)

  def testSimplePathParamsAreEscaped(self):
    client = self._Client(self.MakeResponse({'grams': '350'}))
    result = client.ProjectsBasketsWeigh(
        'my project', 'a/b', self.messages.WeighRequest(scale='kitchen'))
    method, url, kwargs = self._LastCall()
    self.assertEqual('POST', method)
    self.assertEqual('https://fruits.googleapis.com/v1/projects/my%20project/'
                     'baskets/a%2Fb:weigh', url)
    self.assertEqual({'scale': 'kitchen'}, json.loads(kwargs['data']))
    self.assertEqual(350, result.grams)

  def testEmptyResponse(self):
    client = self._Client(self.MakeResponse('{}'))
    result = client.ProjectsBasketsDelete('projects/p/baskets/b')
    method, url, _ = self._LastCall()
    self.assertEqual('DELETE', method)
    self.assertEqual('https://fruits.googleapis.com/v1/projects/p/baskets/b',
                     url)
    self.assertEqual(self.messages.Empty(), result)

  def testMessages(self):
    basket_fields = dict(
        (f.name, f) for f in self.messages.Basket.all_fields())
    self.assertEqual(
        ['capacity', 'checksum', 'class_', 'createTime', 'dimensions',
         'displayName', 'fruits', 'labels', 'metadata', 'name', 'state',
         'weightGrams'],
        sorted(basket_fields))
    self.assertEqual(1, basket_fields['capacity'].number)
    self.assertEqual(12, basket_fields['weightGrams'].number)
    self.assertEqual(_messages.Variant.INT64,
                     basket_fields['weightGrams'].variant)
    self.assertIsInstance(basket_fields['createTime'],
                          message_types.DateTimeField)
    self.assertIsInstance(basket_fields['checksum'], _messages.BytesField)
    self.assertTrue(basket_fields['fruits'].repeated)
    self.assertIs(self.messages.Basket.DimensionsValue,
                  basket_fields['dimensions'].type)
    self.assertEqual(
        _messages.Variant.FLOAT,
        self.messages.Basket.DimensionsValue.field_by_name('height').variant)
    self.assertEqual(
        _messages.Variant.DOUBLE,
        self.messages.Basket.DimensionsValue.field_by_name('width').variant)

    fruit_fields = dict((f.name, f) for f in self.messages.Fruit.all_fields())
    self.assertIs(extra_types.JsonValue, fruit_fields['extra'].type)
    self.assertTrue(fruit_fields['tags'].repeated)
    self.assertEqual(['APPLE', 'KIND_UNSPECIFIED', '_1'],
                     sorted(self.messages.Fruit.KindValueValuesEnum.names()))

  def testMapMessages(self):
    metadata_entry = self.messages.Basket.MetadataValue.AdditionalProperty
    self.assertIs(extra_types.JsonValue,
                  metadata_entry.field_by_name('value').type)
    basket = encoding.PyValueToMessage(self.messages.Basket, {
        'labels': {'a': 'b'},
        'metadata': {'size': 3, 'tags': ['x']},
    })
    self.assertEqual({'a': 'b'},
                     encoding.AdditionalPropertiesToDict(basket.labels))
    self.assertEqual({'labels': {'a': 'b'},
                      'metadata': {'size': 3, 'tags': ['x']}},
                     encoding.MessageToPyValue(basket))

  def testCustomMappings(self):
    self.assertEqual('class', encoding.GetCustomJsonFieldMapping(
        self.messages.Basket, python_name='class_'))
    self.assertEqual('_1', encoding.GetCustomJsonEnumMapping(
        self.messages.Fruit.KindValueValuesEnum, json_name='1'))
    source = files.ReadFileContents(os.path.join(
        self.output_dir, 'fruits', 'v1', 'fruits_v1_messages.py'))
    self.assertIn("encoding.AddCustomJsonFieldMapping(\n"
                  "    Basket, 'class_', 'class')\n", source)
    self.assertIn("encoding.AddCustomJsonEnumMapping(\n"
                  "    Fruit.KindValueValuesEnum, '_1', '1')\n", source)

  def testRegenerationIsStable(self):
    client_file = os.path.join(self.output_dir, 'fruits', 'v1',
                               'fruits_v1_client.py')
    before = files.ReadFileContents(client_file)
    generate.GenerateApi(_FRUITS_DOC, self.output_dir, 'fruitgen', 'fruits',
                         'v1')
    self.assertEqual(before, files.ReadFileContents(client_file))


class GenerateApiErrorsTest(test_case.Base):

  def SetUp(self):
    self.doc = discovery.DiscoveryDoc.FromJson(_FRUITS_DOC)
    self.output_dir = os.path.join(self.temp_path, 'out')

  def testWrongApiName(self):
    with self.assertRaisesRegex(generate.WrongDiscoveryDocError,
                                r'for api \[fruits\], expected \[pears\]'):
      generate.GenerateApi(self.doc, self.output_dir, 'out', 'pears', 'v1')
    self.assertFalse(os.path.exists(self.output_dir))

  def testVersionMismatchWarns(self):
    with self.assertLogs(level='WARNING') as logs:
      generate.GenerateApi(self.doc, self.output_dir, 'out', 'fruits',
                           'v1alpha')
    self.assertIn('Discovery api version v1 does not match v1alpha',
                  logs.output[0])
    self.assertTrue(os.path.isfile(os.path.join(
        self.output_dir, 'fruits', 'v1alpha', 'fruits_v1alpha_client.py')))

  def testConflictingMethodNames(self):
    doc_dict = self.doc.AsDict()
    doc_dict['resources']['projectsBaskets'] = {
        'methods': {'get': {'id': 'fruits.projectsBaskets.get',
                            'path': 'v1/{+name}',
                            'parameters': {}}},
    }
    with self.assertRaises(naming.ConflictingMethodName):
      generate.GenerateApi(discovery.DiscoveryDoc.FromDict(doc_dict),
                           self.output_dir, 'out', 'fruits', 'v1')

  def testUnsupportedSchema(self):
    doc_dict = self.doc.AsDict()
    doc_dict['schemas']['Weight'] = {'type': 'string'}
    with self.assertRaisesRegex(discovery.UnsupportedDiscoveryDoc,
                                r'Schema \[Weight\] has type \[string\]'):
      generate.GenerateApi(discovery.DiscoveryDoc.FromDict(doc_dict),
                           self.output_dir, 'out', 'fruits', 'v1')


class GenerateApiMapTest(test_case.Base):

  def _GenerateMap(self, package_map, apis_config):
    output_file = os.path.join(self.temp_path, 'apis_map.py')
    generate.GenerateApiMap(output_file, package_map, apis_config)
    namespace = {}
    exec(files.ReadFileContents(output_file),  # pylint: disable=exec-used
         namespace)
    return namespace['MAP']

  def testSingleVersionIsDefault(self):
    api_map = self._GenerateMap(
        {'fruits': {'v1': 'fruitgen'}},
        {'fruits': {'v1': {'discovery_doc': 'fruits_v1.json'}}})
    self.assertEqual(['fruits'], list(api_map))
    fruits_v1 = api_map['fruits']['v1']
    self.assertEqual('fruitgen.fruits.v1', fruits_v1.class_path)
    self.assertEqual('fruits_v1_client.FruitsV1', fruits_v1.client_classpath)
    self.assertEqual('fruits_v1_messages', fruits_v1.messages_modulepath)
    self.assertTrue(fruits_v1.default_version)
    self.assertEqual('', fruits_v1.base_url)

  def testDefaultVersion(self):
    api_map = self._GenerateMap(
        {'fruits': {'v1': 'fruitgen', 'v2': 'fruitgen'}},
        {'fruits': {'v1': {'discovery_doc': 'fruits_v1.json'},
                    'v2': {'discovery_doc': 'fruits_v2.json',
                           'default': True}}})
    self.assertFalse(api_map['fruits']['v1'].default_version)
    self.assertTrue(api_map['fruits']['v2'].default_version)

  def testCommittedApiGetsBaseUrl(self):
    api_map = self._GenerateMap(
        {'assuredworkloads': {'v1': 'gapis.generated_clients.apis'}},
        {'assuredworkloads': {'v1': {'discovery_doc': 'x.json'}}})
    self.assertEqual(
        'https://assuredworkloads.googleapis.com/',
        api_map['assuredworkloads']['v1'].base_url)

  def testMatchesApiDef(self):
    api_map = self._GenerateMap(
        {'fruits': {'v1': 'fruitgen'}},
        {'fruits': {'v1': {'discovery_doc': 'fruits_v1.json'}}})
    self.assertEqual(
        'APIDef("fruitgen.fruits.v1", "fruits_v1_client.FruitsV1", '
        '"fruits_v1_messages", True, "")',
        api_map['fruits']['v1'].get_init_source())

  def testNoDefault(self):
    with self.assertRaisesRegex(generate.NoDefaultApiError,
                                r'No default client versions found for '
                                r'\[fruits\]'):
      generate.GenerateApiMap(
          os.path.join(self.temp_path, 'apis_map.py'),
          {'fruits': {'v1': 'fruitgen', 'v2': 'fruitgen'}},
          {'fruits': {'v1': {}, 'v2': {}}})

  def testMultipleDefaults(self):
    with self.assertRaisesRegex(generate.NoDefaultApiError,
                                r'Multiple default client versions found '
                                r'for \[fruits\]'):
      generate.GenerateApiMap(
          os.path.join(self.temp_path, 'apis_map.py'),
          {'fruits': {'v1': 'fruitgen', 'v2': 'fruitgen'}},
          {'fruits': {'v1': {'default': True}, 'v2': {'default': True}}})


class GenerateIndexTest(test_case.Base):

  def testIndex(self):
    fruits = discovery.DiscoveryDoc.FromJson(_FRUITS_DOC)
    pears = discovery.DiscoveryDoc.FromDict({
        'name': 'pears', 'version': 'v4.1', 'title': 'Pears <Beta> API'})
    output_file = os.path.join(self.temp_path, 'index.html')

    generate.GenerateIndex(output_file, [pears, fruits], 'fruitgen')

    html = files.ReadFileContents(output_file)
    self.assertTrue(html.startswith('<!DOCTYPE html>'))
    self.assertIn('from fruitgen.fruits.v1.fruits_v1_client import Fruits\n',
                  html)
    self.assertIn('<pre>from fruitgen.fruits.v1.fruits_v1_client import '
                  'Fruits</pre>', html)
    self.assertIn('<pre>from fruitgen.pears.v4_1.pears_v4_1_client import '
                  'Pears</pre>', html)
    self.assertIn('<a href="https://cloud.google.com/fruits">Docs</a>', html)
    self.assertIn('Pears &lt;Beta&gt; API', html)
    self.assertLess(html.index('Fruit Basket API'),
                    html.index('Pears &lt;Beta&gt; API'))
