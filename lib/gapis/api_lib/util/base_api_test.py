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
"""Tests for the base class of generated clients."""

import datetime
import json
from unittest import mock

from apitools.base.py import exceptions as apitools_exceptions

from gapis.api_lib.util import base_api
from gapis.core import properties
from gapis.core.util import times
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages as messages
from gapis.tests.lib import test_case


class WorkloadsClient(base_api.BaseApiClient):
  """A hand written client for a few Assured Workloads methods."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://assuredworkloads.googleapis.com/'
  _PACKAGE = 'assuredworkloads'
  _SCOPES = ['https://www.googleapis.com/auth/cloud-platform']
  _VERSION = 'v1'

  def __init__(self, **kwargs):
    super(WorkloadsClient, self).__init__(**kwargs)
    self._method_configs = {
        'Create': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.'
                      'create',
            http_method='POST',
            relative_path='v1/{+parent}/workloads',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['externalId'],
            request_type_name='GoogleCloudAssuredworkloadsV1Workload',
            response_type_name='GoogleLongrunningOperation',
        ),
        'Delete': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.'
                      'delete',
            http_method='DELETE',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['etag'],
            response_type_name='GoogleProtobufEmpty',
        ),
        'ListViolations': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.'
                      'violations.list',
            http_method='GET',
            relative_path='v1/{+parent}/violations',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['filter', 'interval.startTime', 'pageSize',
                          'pageToken'],
            response_type_name=(
                'GoogleCloudAssuredworkloadsV1ListViolationsResponse'),
        ),
        'Ping': base_api.ApiMethodInfo(
            method_id='assuredworkloads.ping',
            http_method='POST',
            relative_path='v1/{a}/{b}:ping',
            ordered_params=['a', 'b'],
            path_params=['a', 'b'],
        ),
    }


class ExpandRelativePathTest(test_case.Base):

  def testReservedExpansionKeepsSlashes(self):
    self.assertEqual(
        'v1/organizations/1/locations/us/workloads/w%201',
        base_api.ExpandRelativePath(
            'v1/{+name}',
            {'name': 'organizations/1/locations/us/workloads/w 1'}))

  def testReservedExpansionEscapesQueryDelimiters(self):
    self.assertEqual(
        'v1/a%3Fb%23c',
        base_api.ExpandRelativePath('v1/{+name}', {'name': 'a?b#c'}))

  def testSimpleExpansionEscapesSlashes(self):
    self.assertEqual(
        'v1/a%2Fb/c:ping',
        base_api.ExpandRelativePath('v1/{a}/{b}:ping', {'a': 'a/b', 'b': 'c'}))

  def testNonStringValues(self):
    self.assertEqual(
        'v1/42/true',
        base_api.ExpandRelativePath('v1/{a}/{b}', {'a': 42, 'b': True}))

  def testMissing(self):
    with self.assertRaisesRegex(base_api.InvalidUserInputError, r'\[b\]'):
      base_api.ExpandRelativePath('v1/{a}/{b}', {'a': 'x'})


class FormatParamTest(test_case.Base):

  def testFormats(self):
    self.assertEqual('true', base_api.FormatParam(True))
    self.assertEqual('false', base_api.FormatParam(False))
    self.assertEqual('10', base_api.FormatParam(10))
    self.assertEqual('1.5', base_api.FormatParam(1.5))
    self.assertEqual('AP8Q', base_api.FormatParam(b'\x00\xff\x10'))
    self.assertEqual(
        '2024-01-02T03:04:05.000Z',
        base_api.FormatParam(
            datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC)))
    self.assertEqual(
        'RESOLVED',
        base_api.FormatParam(messages.GoogleCloudAssuredworkloadsV1Violation
                             .StateValueValuesEnum.RESOLVED))


class PrepareHttpRequestTest(test_case.Base):

  def SetUp(self):
    self.client = WorkloadsClient(get_credentials=False)

  def testUrlAndQuery(self):
    url, headers, body = self.client.PrepareHttpRequest(
        self.client.GetMethodConfig('ListViolations'),
        {'parent': 'organizations/1/locations/us/workloads/w'},
        query_params={
            'pageSize': 10,
            'filter': 'state = ACTIVE',
            'pageToken': None,
            'interval.startTime': datetime.datetime(
                2024, 1, 2, 3, 4, 5, tzinfo=times.UTC),
        })
    self.assertEqual(
        'https://assuredworkloads.googleapis.com/v1/organizations/1/locations/'
        'us/workloads/w/violations?filter=state+%3D+ACTIVE'
        '&interval.startTime=2024-01-02T03%3A04%3A05.000Z&pageSize=10',
        url)
    self.assertEqual({'Accept': 'application/json'}, headers)
    self.assertIsNone(body)

  def testRepeatedQueryParam(self):
    url, _, _ = self.client.PrepareHttpRequest(
        self.client.GetMethodConfig('ListViolations'),
        {'parent': 'p'}, query_params={'filter': ['a', 'b']})
    self.assertTrue(url.endswith('/v1/p/violations?filter=a&filter=b'))

  def testGlobalParamsAndHeaders(self):
    client = WorkloadsClient(
        get_credentials=False,
        additional_http_headers={'X-Goog-Request-Reason': 'audit'},
        default_global_params={'prettyPrint': False})
    client.AddGlobalParam('key', 'my-key')
    url, headers, _ = client.PrepareHttpRequest(
        client.GetMethodConfig('Delete'), {'name': 'n'},
        query_params={'etag': 'e1'})
    self.assertEqual(
        'https://assuredworkloads.googleapis.com/v1/n'
        '?etag=e1&prettyPrint=false&key=my-key', url)
    self.assertEqual('audit', headers['X-Goog-Request-Reason'])

  def testRequestBody(self):
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        displayName='w', resources=[
            messages.GoogleCloudAssuredworkloadsV1WorkloadResourceInfo(
                resourceId=9007199254740993)])
    _, headers, body = self.client.PrepareHttpRequest(
        self.client.GetMethodConfig('Create'), {'parent': 'p'},
        request=workload)
    self.assertEqual('application/json', headers['Content-Type'])
    self.assertEqual(
        {'displayName': 'w', 'resources': [{'resourceId': '9007199254740993'}]},
        json.loads(body))

  def testWrongRequestType(self):
    with self.assertRaisesRegex(base_api.InvalidUserInputError,
                                'GoogleCloudAssuredworkloadsV1Workload'):
      self.client.PrepareHttpRequest(
          self.client.GetMethodConfig('Create'), {'parent': 'p'},
          request=messages.GoogleProtobufEmpty())

  def testRequestForMethodWithoutBody(self):
    with self.assertRaises(base_api.InvalidUserInputError):
      self.client.PrepareHttpRequest(
          self.client.GetMethodConfig('Delete'), {'name': 'n'},
          request=messages.GoogleProtobufEmpty())

  def testMissingPathParam(self):
    with self.assertRaises(base_api.InvalidUserInputError):
      self.client.PrepareHttpRequest(
          self.client.GetMethodConfig('Delete'), {'name': None})

  def testUrlOverride(self):
    client = WorkloadsClient(url='http://localhost:8080', get_credentials=False)
    url, _, _ = client.PrepareHttpRequest(client.GetMethodConfig('Delete'),
                                          {'name': 'n'})
    self.assertEqual('http://localhost:8080/v1/n', url)


class RunMethodTest(test_case.Base):

  def _Client(self, *responses, **kwargs):
    self.session = self.MakeSession(*responses)
    return WorkloadsClient(session=self.session, **kwargs)

  def testSuccess(self):
    client = self._Client(self.MakeResponse(
        {'name': 'operations/1', 'done': False}))
    operation = client._RunMethod(
        client.GetMethodConfig('Create'), {'parent': 'p'},
        query_params={'externalId': 'ext'},
        request=messages.GoogleCloudAssuredworkloadsV1Workload(
            displayName='w'))
    self.assertEqual(
        messages.GoogleLongrunningOperation(name='operations/1', done=False),
        operation)
    self.session.request.assert_called_once_with(
        'POST',
        'https://assuredworkloads.googleapis.com/v1/p/workloads'
        '?externalId=ext',
        data='{"displayName": "w"}',
        headers={'Accept': 'application/json',
                 'Content-Type': 'application/json'})

  def testEmptyResponseBody(self):
    client = self._Client(self.MakeResponse(''))
    self.assertEqual(
        messages.GoogleProtobufEmpty(),
        client._RunMethod(client.GetMethodConfig('Delete'), {'name': 'n'}))

  def testNoResponseType(self):
    client = self._Client(self.MakeResponse('', status_code=204))
    self.assertIsNone(client._RunMethod(client.GetMethodConfig('Ping'),
                                        {'a': 'x', 'b': 'y'}))

  def testHttpError(self):
    error_body = {'error': {'code': 404, 'message': 'Workload not found.',
                            'status': 'NOT_FOUND'}}
    client = self._Client(self.MakeResponse(
        error_body, status_code=404, reason='Not Found',
        url='https://assuredworkloads.googleapis.com/v1/n'))
    with self.assertRaises(apitools_exceptions.HttpError) as ctx:
      client._RunMethod(client.GetMethodConfig('Delete'), {'name': 'n'})
    error = ctx.exception
    self.assertEqual(404, error.status_code)
    self.assertEqual('Not Found', error.response['reason'])
    self.assertEqual(error_body, json.loads(error.content))
    self.assertEqual('https://assuredworkloads.googleapis.com/v1/n', error.url)

  def testCheckResponseFunc(self):
    check = mock.Mock()
    response = self.MakeResponse({})
    client = self._Client(response, check_response_func=check)
    client._RunMethod(client.GetMethodConfig('Delete'), {'name': 'n'})
    check.assert_called_once_with(response)

  def testMessageTypes(self):
    client = WorkloadsClient(get_credentials=False)
    self.assertEqual(['Create', 'Delete', 'ListViolations', 'Ping'],
                     client.GetMethodsList())
    self.assertIs(messages.GoogleCloudAssuredworkloadsV1Workload,
                  client.GetRequestType('Create'))
    self.assertIs(messages.GoogleProtobufEmpty,
                  client.GetResponseType('Delete'))
    self.assertIsNone(client.GetRequestType('Delete'))


class SessionTest(test_case.Base):

  def SetUp(self):
    self.creds_session = self.StartPatch(
        'gapis.core.credentials.requests.GetSession')
    self.plain_session = self.StartPatch('gapis.core.requests.GetSession')

  def testDefaultCredentials(self):
    client = WorkloadsClient()
    self.assertIs(self.creds_session.return_value, client.session)
    self.creds_session.assert_called_once_with(
        credentials=None, scopes=WorkloadsClient._SCOPES)
    self.plain_session.assert_not_called()

  def testExplicitCredentials(self):
    creds = mock.Mock()
    client = WorkloadsClient(credentials=creds, get_credentials=False)
    self.assertIs(self.creds_session.return_value, client.session)
    self.creds_session.assert_called_once_with(
        credentials=creds, scopes=WorkloadsClient._SCOPES)

  def testNoCredentials(self):
    client = WorkloadsClient(get_credentials=False)
    self.assertIs(self.plain_session.return_value, client.session)
    self.creds_session.assert_not_called()

  def testCredentialsDisabledByProperty(self):
    properties.VALUES.auth.disable_credentials.Set(True)
    client = WorkloadsClient()
    self.assertIs(self.plain_session.return_value, client.session)

  def testSessionIsCreatedOnce(self):
    client = WorkloadsClient()
    self.assertIs(client.session, client.session)
    self.assertEqual(1, self.creds_session.call_count)
