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
"""Tests for the generated Cloud Life Sciences v2beta client."""

import json

from gapis.api_lib.util import apis
from gapis.api_lib.util import list_pager
from gapis.generated_clients.apis.lifesciences.v2beta import lifesciences_v2beta_client as client_lib
from gapis.generated_clients.apis.lifesciences.v2beta import lifesciences_v2beta_messages as messages
from gapis.tests.lib import test_case


_BASE = 'https://lifesciences.googleapis.com/v2beta/'
_PARENT = 'projects/p1/locations/us-central1'
_OPERATION = _PARENT + '/operations/op1'


class LifesciencesClientTest(test_case.Base):

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return client_lib.Lifesciences(session=self.session)

  def _Calls(self):
    return [(c[0][0], c[0][1], c[1])
            for c in self.session.request.call_args_list]

  def testAlias(self):
    self.assertIs(client_lib.LifesciencesV2beta, client_lib.Lifesciences)
    self.assertIs(client_lib.LifesciencesV2beta,
                  apis.GetClientClass('lifesciences', 'v2beta'))
    self.assertIs(messages, apis.GetMessagesModule('lifesciences', 'v2beta'))

  def testMethods(self):
    self.assertEqual([
        'ProjectsLocationsGet',
        'ProjectsLocationsList',
        'ProjectsLocationsOperationsCancel',
        'ProjectsLocationsOperationsGet',
        'ProjectsLocationsOperationsList',
        'ProjectsLocationsPipelinesRun',
    ], self._Client().GetMethodsList())

  def testRunPipeline(self):
    client = self._Client(self.MakeResponse({
        'name': _OPERATION,
        'metadata': {'pubSubTopic': 'projects/p1/topics/t'},
    }))
    request = messages.RunPipelineRequest(
        pubSubTopic='projects/p1/topics/t',
        pipeline=messages.Pipeline(
            actions=[messages.Action(imageUri='bash',
                                     commands=['-c', 'echo hi'])],
            resources=messages.Resources(
                regions=['us-central1'],
                virtualMachine=messages.VirtualMachine(
                    machineType='n1-standard-1',
                    accelerators=[messages.Accelerator(
                        type='nvidia-tesla-t4', count=2)]))))

    operation = client.ProjectsLocationsPipelinesRun(_PARENT, request)

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + _PARENT + '/pipelines:run', url)
    self.assertEqual({
        'pubSubTopic': 'projects/p1/topics/t',
        'pipeline': {
            'actions': [{'imageUri': 'bash', 'commands': ['-c', 'echo hi']}],
            'resources': {
                'regions': ['us-central1'],
                'virtualMachine': {
                    'machineType': 'n1-standard-1',
                    'accelerators': [
                        {'type': 'nvidia-tesla-t4', 'count': '2'}],
                },
            },
        },
    }, json.loads(kwargs['data']))
    self.assertEqual(_OPERATION, operation.name)
    metadata = dict((p.key, p.value)
                    for p in operation.metadata.additionalProperties)
    self.assertEqual('projects/p1/topics/t',
                     metadata['pubSubTopic'].string_value)

  def testCancelOperation(self):
    client = self._Client(self.MakeResponse({}))
    result = client.ProjectsLocationsOperationsCancel(
        _OPERATION, messages.CancelOperationRequest())
    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + _OPERATION + ':cancel', url)
    self.assertEqual({}, json.loads(kwargs['data']))
    self.assertEqual(messages.Empty(), result)

  def testListOperationsPages(self):
    client = self._Client(
        self.MakeResponse({'operations': [{'name': _PARENT + '/operations/a',
                                           'done': True}],
                           'nextPageToken': 'p2'}),
        self.MakeResponse({'operations': [{'name': _PARENT + '/operations/b'}]}))

    operations = list(list_pager.YieldFromList(
        client.ProjectsLocationsOperationsList, _PARENT,
        field='operations', batch_size=1))

    self.assertEqual([_PARENT + '/operations/a', _PARENT + '/operations/b'],
                     [o.name for o in operations])
    self.assertEqual([True, None], [o.done for o in operations])
    urls = [url for _, url, _ in self._Calls()]
    self.assertEqual([
        _BASE + _PARENT + '/operations?pageSize=1',
        _BASE + _PARENT + '/operations?pageSize=1&pageToken=p2',
    ], urls)
