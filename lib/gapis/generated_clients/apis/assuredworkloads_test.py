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
"""Tests for the generated Assured Workloads v1 client."""

import datetime
import json

from apitools.base.py import exceptions as api_exceptions
from gapis.api_lib.util import apis
from gapis.api_lib.util import list_pager
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_client as client_lib
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages as messages
from gapis.tests.lib import test_case


_BASE = 'https://assuredworkloads.googleapis.com/v1/'
_PARENT = 'organizations/123/locations/us-central1'
_WORKLOAD = _PARENT + '/workloads/w1'


class AssuredWorkloadsClientTest(test_case.Base):

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return client_lib.AssuredWorkloads(session=self.session)

  def _Calls(self):
    return [(c[0][0], c[0][1], c[1])
            for c in self.session.request.call_args_list]

  def testAlias(self):
    self.assertIs(client_lib.AssuredworkloadsV1, client_lib.AssuredWorkloads)
    self.assertIs(client_lib.AssuredworkloadsV1,
                  apis.GetClientClass('assuredworkloads', 'v1'))
    self.assertIs(messages, apis.GetMessagesModule('assuredworkloads', 'v1'))

  def testMethods(self):
    self.assertEqual([
        'OrganizationsLocationsOperationsGet',
        'OrganizationsLocationsOperationsList',
        'OrganizationsLocationsWorkloadsCreate',
        'OrganizationsLocationsWorkloadsDelete',
        'OrganizationsLocationsWorkloadsGet',
        'OrganizationsLocationsWorkloadsList',
        'OrganizationsLocationsWorkloadsMutatePartnerPermissions',
        'OrganizationsLocationsWorkloadsPatch',
        'OrganizationsLocationsWorkloadsRestrictAllowedResources',
        'OrganizationsLocationsWorkloadsViolationsAcknowledge',
        'OrganizationsLocationsWorkloadsViolationsGet',
        'OrganizationsLocationsWorkloadsViolationsList',
    ], self._Client().GetMethodsList())

  def testCreate(self):
    client = self._Client(self.MakeResponse({
        'name': _PARENT + '/operations/op1',
        'done': False,
        'metadata': {
            '@type': 'type.googleapis.com/google.cloud.assuredworkloads.v1.'
                     'CreateWorkloadOperationMetadata',
            'createTime': '2024-05-01T12:00:00Z',
        },
    }))
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        displayName='Sovereign',
        billingAccount='billingAccounts/000000-000000-000000',
        complianceRegime=(messages.GoogleCloudAssuredworkloadsV1Workload
                          .ComplianceRegimeValueValuesEnum.FEDRAMP_MODERATE))

    operation = client.OrganizationsLocationsWorkloadsCreate(
        _PARENT, workload, externalId='ext-1')

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + _PARENT + '/workloads?externalId=ext-1', url)
    self.assertEqual({
        'displayName': 'Sovereign',
        'billingAccount': 'billingAccounts/000000-000000-000000',
        'complianceRegime': 'FEDRAMP_MODERATE',
    }, json.loads(kwargs['data']))
    self.assertEqual(_PARENT + '/operations/op1', operation.name)
    self.assertFalse(operation.done)
    metadata = dict((p.key, p.value)
                    for p in operation.metadata.additionalProperties)
    self.assertEqual('2024-05-01T12:00:00Z',
                     metadata['createTime'].string_value)

  def testPatchWithUpdateMask(self):
    client = self._Client(self.MakeResponse({
        'name': _WORKLOAD,
        'displayName': 'Renamed',
        'createTime': '2024-05-01T12:00:00.250Z',
        'labels': {'env': 'prod'},
        'etag': 'abc',
    }))
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        displayName='Renamed', etag='abc')

    result = client.OrganizationsLocationsWorkloadsPatch(
        _WORKLOAD, workload, updateMask='displayName,labels')

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('PATCH', method)
    self.assertEqual(_BASE + _WORKLOAD + '?updateMask=displayName%2Clabels',
                     url)
    self.assertEqual({'displayName': 'Renamed', 'etag': 'abc'},
                     json.loads(kwargs['data']))
    self.assertEqual('Renamed', result.displayName)
    self.assertEqual(
        datetime.datetime(2024, 5, 1, 12, 0, 0, 250000,
                          tzinfo=datetime.timezone.utc),
        result.createTime)
    self.assertEqual([('env', 'prod')],
                     [(p.key, p.value)
                      for p in result.labels.additionalProperties])

  def testMutatePartnerPermissions(self):
    client = self._Client(self.MakeResponse({'name': _WORKLOAD}))
    request = messages.GoogleCloudAssuredworkloadsV1MutatePartnerPermissionsRequest(
        etag='abc',
        updateMask='dataLogsViewer',
        partnerPermissions=(
            messages.GoogleCloudAssuredworkloadsV1WorkloadPartnerPermissions(
                dataLogsViewer=True)))

    client.OrganizationsLocationsWorkloadsMutatePartnerPermissions(
        _WORKLOAD, request)

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('PATCH', method)
    self.assertEqual(_BASE + _WORKLOAD + ':mutatePartnerPermissions', url)
    self.assertEqual({
        'etag': 'abc',
        'updateMask': 'dataLogsViewer',
        'partnerPermissions': {'dataLogsViewer': True},
    }, json.loads(kwargs['data']))

  def testDeleteWithEtag(self):
    client = self._Client(self.MakeResponse({}))
    result = client.OrganizationsLocationsWorkloadsDelete(_WORKLOAD,
                                                          etag='abc')
    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('DELETE', method)
    self.assertEqual(_BASE + _WORKLOAD + '?etag=abc', url)
    self.assertIsNone(kwargs['data'])
    self.assertEqual(messages.GoogleProtobufEmpty(), result)

  def testListViolations(self):
    client = self._Client(self.MakeResponse({
        'violations': [{
            'name': _WORKLOAD + '/violations/v1',
            'state': 'UNRESOLVED',
            'beginTime': '2024-04-30T00:00:00Z',
            'category': 'Location',
        }],
    }))
    start = datetime.datetime(2024, 4, 1, tzinfo=datetime.timezone.utc)

    result = client.OrganizationsLocationsWorkloadsViolationsList(
        _WORKLOAD, interval_startTime=start, pageSize=50)

    [(method, url, _)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(
        _BASE + _WORKLOAD + '/violations'
        '?interval.startTime=2024-04-01T00%3A00%3A00.000Z&pageSize=50', url)
    [violation] = result.violations
    self.assertEqual(
        messages.GoogleCloudAssuredworkloadsV1Violation
        .StateValueValuesEnum.UNRESOLVED, violation.state)
    self.assertEqual('Location', violation.category)
    self.assertIsNone(result.nextPageToken)

  def testListWorkloadsPages(self):
    client = self._Client(
        self.MakeResponse({'workloads': [{'name': _PARENT + '/workloads/a'}],
                           'nextPageToken': 'p2'}),
        self.MakeResponse({'workloads': [{'name': _PARENT + '/workloads/b'}]}))

    names = [w.name for w in list_pager.YieldFromList(
        client.OrganizationsLocationsWorkloadsList, _PARENT,
        field='workloads', batch_size=1, filter='state:ACTIVE')]

    self.assertEqual([_PARENT + '/workloads/a', _PARENT + '/workloads/b'],
                     names)
    urls = [url for _, url, _ in self._Calls()]
    self.assertEqual([
        _BASE + _PARENT + '/workloads?filter=state%3AACTIVE&pageSize=1',
        _BASE + _PARENT +
        '/workloads?filter=state%3AACTIVE&pageSize=1&pageToken=p2',
    ], urls)

  def testNotFound(self):
    client = self._Client(self.MakeResponse(
        {'error': {'code': 404, 'message': 'Workload not found.',
                   'status': 'NOT_FOUND'}},
        status_code=404, reason='Not Found', url=_BASE + _WORKLOAD))
    with self.assertRaises(api_exceptions.HttpError) as ctx:
      client.OrganizationsLocationsWorkloadsGet(_WORKLOAD)
    self.assertEqual(404, ctx.exception.status_code)
    self.assertEqual(_BASE + _WORKLOAD, ctx.exception.url)
    self.assertIn(b'Workload not found.', ctx.exception.content)

  def testOperationsList(self):
    client = self._Client(self.MakeResponse({
        'operations': [{'name': _PARENT + '/operations/op1', 'done': True,
                        'response': {'name': _WORKLOAD}}],
    }))
    result = client.OrganizationsLocationsOperationsList(
        _PARENT, filter='done=true')
    [(_, url, _)] = self._Calls()
    self.assertEqual(_BASE + _PARENT + '/operations?filter=done%3Dtrue', url)
    [operation] = result.operations
    self.assertTrue(operation.done)
    response = dict((p.key, p.value)
                    for p in operation.response.additionalProperties)
    self.assertEqual(_WORKLOAD, response['name'].string_value)
