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
"""Tests for the generated Cloud Support v2beta client."""

import datetime
import json

from apitools.base.py import exceptions as api_exceptions
from gapis.api_lib.util import apis
from gapis.generated_clients.apis.cloudsupport.v2beta import cloudsupport_v2beta_client as client_lib
from gapis.generated_clients.apis.cloudsupport.v2beta import cloudsupport_v2beta_messages as messages
from gapis.tests.lib import test_case


_BASE = 'https://cloudsupport.googleapis.com/v2beta/'
_PARENT = 'projects/p1'
_CASE = _PARENT + '/cases/42'


class CloudsupportClientTest(test_case.Base):

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return client_lib.Cloudsupport(session=self.session)

  def _Calls(self):
    return [(c[0][0], c[0][1], c[1])
            for c in self.session.request.call_args_list]

  def testAlias(self):
    self.assertIs(client_lib.CloudsupportV2beta, client_lib.Cloudsupport)
    self.assertIs(client_lib.CloudsupportV2beta,
                  apis.GetClientClass('cloudsupport', 'v2beta'))
    self.assertIs(messages, apis.GetMessagesModule('cloudsupport', 'v2beta'))

  def testCreateCase(self):
    client = self._Client(self.MakeResponse({
        'name': _CASE,
        'displayName': 'VM down',
        'priority': 'P1',
        'state': 'NEW',
        'createTime': '2024-03-04T05:06:07.890Z',
    }))
    case = messages.Case(
        displayName='VM down',
        priority=messages.Case.PriorityValueValuesEnum.P1,
        classification=messages.CaseClassification(id='100'),
        testCase=True)

    result = client.CasesCreate(_PARENT, case)

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + _PARENT + '/cases', url)
    self.assertEqual({
        'displayName': 'VM down',
        'priority': 'P1',
        'classification': {'id': '100'},
        'testCase': True,
    }, json.loads(kwargs['data']))
    self.assertEqual(_CASE, result.name)
    self.assertEqual(messages.Case.StateValueValuesEnum.NEW, result.state)
    self.assertEqual(
        datetime.datetime(2024, 3, 4, 5, 6, 7, 890000,
                          tzinfo=datetime.timezone.utc),
        result.createTime)

  def testPatchCase(self):
    client = self._Client(self.MakeResponse({'name': _CASE,
                                             'severity': 'S2'}))
    result = client.CasesPatch(
        _CASE, messages.Case(severity=messages.Case.SeverityValueValuesEnum.S2),
        updateMask='severity')
    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('PATCH', method)
    self.assertEqual(_BASE + _CASE + '?updateMask=severity', url)
    self.assertEqual({'severity': 'S2'}, json.loads(kwargs['data']))
    self.assertEqual(messages.Case.SeverityValueValuesEnum.S2, result.severity)

  def testSearchCases(self):
    client = self._Client(self.MakeResponse({
        'cases': [{'name': _CASE, 'escalated': True, 'state': 'FUTURE_STATE'}],
        'nextPageToken': 'n',
    }))
    result = client.CasesSearch(query='state=OPEN', pageSize=10)
    [(method, url, _)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(_BASE + 'cases:search?pageSize=10&query=state%3DOPEN',
                     url)
    [case] = result.cases
    self.assertTrue(case.escalated)
    self.assertIsNone(case.state)
    self.assertEqual('n', result.nextPageToken)

  def testDownloadMedia(self):
    client = self._Client(self.MakeResponse({
        'filename': 'log.txt',
        'inline': 'aGk=',
        'length': '2',
    }))
    result = client.MediaDownload(_CASE + '/attachments/a1')
    [(method, url, _)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(_BASE + _CASE + '/attachments/a1:download', url)
    self.assertEqual(b'hi', result.inline)
    self.assertEqual(2, result.length)

  def testPermissionDenied(self):
    client = self._Client(self.MakeResponse(
        {'error': {'code': 403, 'message': 'Permission denied.'}},
        status_code=403, reason='Forbidden', url=_BASE + _CASE))
    with self.assertRaises(api_exceptions.HttpError) as ctx:
      client.CasesGet(_CASE)
    self.assertEqual(403, ctx.exception.status_code)
