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
"""Tests for the generated Ad Exchange Buyer API II v2beta1 client."""

import datetime
import json

from gapis.api_lib.util import apis
from gapis.generated_clients.apis.adexchangebuyer2.v2beta1 import adexchangebuyer2_v2beta1_client as client_lib
from gapis.generated_clients.apis.adexchangebuyer2.v2beta1 import adexchangebuyer2_v2beta1_messages as messages
from gapis.tests.lib import test_case


_BASE = 'https://adexchangebuyer.googleapis.com/v2beta1/'
_ACCOUNT = 12345678901
_FILTER_SET = 'bidders/123/filterSets/fs1'


class Adexchangebuyer2ClientTest(test_case.Base):

  def _Client(self, *responses):
    self.session = self.MakeSession(*responses)
    return client_lib.Adexchangebuyer2(session=self.session)

  def _Calls(self):
    return [(c[0][0], c[0][1], c[1])
            for c in self.session.request.call_args_list]

  def testAlias(self):
    self.assertIs(client_lib.Adexchangebuyer2V2beta1,
                  client_lib.Adexchangebuyer2)
    self.assertIs(client_lib.Adexchangebuyer2V2beta1,
                  apis.GetClientClass('adexchangebuyer2', 'v2beta1'))
    self.assertIs(messages,
                  apis.GetMessagesModule('adexchangebuyer2', 'v2beta1'))

  def testCreateClient(self):
    client = self._Client(self.MakeResponse({
        'clientAccountId': '9007199254740993',
        'clientName': 'Acme',
        'entityType': 'ADVERTISER',
        'status': 'ACTIVE',
    }))
    request = messages.Client(
        clientName='Acme',
        entityId=9007199254740993,
        entityType=messages.Client.EntityTypeValueValuesEnum.ADVERTISER,
        visibleToSeller=False)

    result = client.AccountsClientsCreate(_ACCOUNT, request)

    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('POST', method)
    self.assertEqual(_BASE + 'accounts/12345678901/clients', url)
    self.assertEqual({
        'clientName': 'Acme',
        'entityId': '9007199254740993',
        'entityType': 'ADVERTISER',
        'visibleToSeller': False,
    }, json.loads(kwargs['data']))
    self.assertEqual(9007199254740993, result.clientAccountId)
    self.assertEqual(messages.Client.StatusValueValuesEnum.ACTIVE,
                     result.status)

  def testGetClient(self):
    client = self._Client(self.MakeResponse({'clientAccountId': '7'}))
    result = client.AccountsClientsGet(_ACCOUNT, 7)
    [(method, url, kwargs)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(_BASE + 'accounts/12345678901/clients/7', url)
    self.assertIsNone(kwargs['data'])
    self.assertEqual(7, result.clientAccountId)

  def testListClients(self):
    client = self._Client(self.MakeResponse({
        'clients': [{'clientAccountId': '1'}, {'clientAccountId': '2'}],
    }))
    result = client.AccountsClientsList(_ACCOUNT, partnerClientId='p 1')
    [(_, url, _)] = self._Calls()
    self.assertEqual(
        _BASE + 'accounts/12345678901/clients?partnerClientId=p+1', url)
    self.assertEqual([1, 2], [c.clientAccountId for c in result.clients])
    self.assertIsNone(result.nextPageToken)

  def testListBidMetrics(self):
    client = self._Client(self.MakeResponse({
        'bidMetricsRows': [{
            'bids': {'value': '12000000000', 'variance': '3'},
            'rowDimensions': {
                'timeInterval': {'startTime': '2024-06-01T00:00:00Z',
                                 'endTime': '2024-06-02T00:00:00Z'},
            },
        }],
        'nextPageToken': 'more',
    }))
    result = client.BiddersFilterSetsBidMetricsList(_FILTER_SET, pageSize=1)
    [(method, url, _)] = self._Calls()
    self.assertEqual('GET', method)
    self.assertEqual(_BASE + _FILTER_SET + '/bidMetrics?pageSize=1', url)
    [row] = result.bidMetricsRows
    self.assertEqual(12000000000, row.bids.value)
    self.assertEqual(3, row.bids.variance)
    self.assertEqual(
        datetime.datetime(2024, 6, 1, tzinfo=datetime.timezone.utc),
        row.rowDimensions.timeInterval.startTime)
    self.assertEqual('more', result.nextPageToken)
