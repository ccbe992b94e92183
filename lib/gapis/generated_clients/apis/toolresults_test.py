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
"""Tests for the generated Tool Results v1beta3 client."""

import json
import math

from gapis.api_lib.util import apis
from gapis.generated_clients.apis.toolresults.v1beta3 import toolresults_v1beta3_client as client_lib
from gapis.generated_clients.apis.toolresults.v1beta3 import toolresults_v1beta3_messages as messages
from gapis.tests.lib import test_case


_BASE = 'https://toolresults.googleapis.com/toolresults/v1beta3/'


class ToolresultsClientTest(test_case.Base):

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return client_lib.Toolresults(session=self.session)

  def _Calls(self):
    return [(c[0][0], c[0][1], c[1])
            for c in self.session.request.call_args_list]

  def testAlias(self):
    self.assertIs(client_lib.ToolresultsV1beta3, client_lib.Toolresults)
    self.assertIs(client_lib.ToolresultsV1beta3,
                  apis.GetClientClass('toolresults', 'v1beta3'))
    self.assertIs(messages, apis.GetMessagesModule('toolresults', 'v1beta3'))

  def testCreateHistory(self):
    client = self._Client(self.MakeResponse({
        'historyId': 'bh.1234',
        'name': 'nightly',
        'testPlatform': 'android',
    }))
    history = messages.History(
        name='nightly',
        testPlatform=messages.History.TestPlatformValueValuesEnum.android)

    result = client.ProjectsHistoriesCreate('my-project', history,
                                            requestId='r1')

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + 'projects/my-project/histories?requestId=r1', url)
    self.assertEqual({'name': 'nightly', 'testPlatform': 'android'},
                     json.loads(kwargs['data']))
    self.assertEqual('bh.1234', result.historyId)
    self.assertEqual(messages.History.TestPlatformValueValuesEnum.android,
                     result.testPlatform)

  def testPathParamsAreEscaped(self):
    client = self._Client(self.MakeResponse({'defaultBucket': 'b'}))
    result = client.ProjectsGetSettings('a/b')
    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(_BASE + 'projects/a%2Fb/settings', url)
    self.assertIsNone(kwargs['data'])
    self.assertEqual(messages.ProjectSettings(defaultBucket='b'), result)

  def testListHistories(self):
    client = self._Client(self.MakeResponse({
        'histories': [{'historyId': 'h1'}, {'historyId': 'h2'}],
        'nextPageToken': 'next',
    }))
    result = client.ProjectsHistoriesList('p', filterByName='nightly',
                                          pageSize=2)
    [(_, url, _)] = self._Calls()
    self.assertEqual(
        _BASE + 'projects/p/histories?filterByName=nightly&pageSize=2', url)
    self.assertEqual(['h1', 'h2'], [h.historyId for h in result.histories])
    self.assertEqual('next', result.nextPageToken)

  def testBatchCreatePerfSamples(self):
    client = self._Client(self.MakeResponse({
        'perfSamples': [
            {'sampleTime': {'seconds': '1700000000', 'nanos': 5},
             'value': 1.5},
            {'sampleTime': {'seconds': '1700000001'}, 'value': 'Infinity'},
        ],
    }))
    request = messages.BatchCreatePerfSamplesRequest(perfSamples=[
        messages.PerfSample(
            sampleTime=messages.Timestamp(seconds=1700000000, nanos=5),
            value=float('nan')),
    ])

    result = client.ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesBatchCreate(
        'p', 'h', 'e', 's', '3', request)

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(
        _BASE + 'projects/p/histories/h/executions/e/steps/s/'
        'perfSampleSeries/3/samples:batchCreate', url)
    self.assertEqual({
        'perfSamples': [{
            'sampleTime': {'seconds': '1700000000', 'nanos': 5},
            'value': 'NaN',
        }],
    }, json.loads(kwargs['data']))
    first, second = result.perfSamples
    self.assertEqual(1700000000, first.sampleTime.seconds)
    self.assertEqual(5, first.sampleTime.nanos)
    self.assertEqual(1.5, first.value)
    self.assertIsNone(second.sampleTime.nanos)
    self.assertTrue(math.isinf(second.value))
