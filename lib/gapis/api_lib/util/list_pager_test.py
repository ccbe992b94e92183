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
"""Tests for list_pager."""

from unittest import mock

from gapis.api_lib.util import list_pager
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages as messages
from gapis.tests.lib import test_case


_PARENT = 'organizations/1/locations/us'


def _Workloads(*names):
  return [messages.GoogleCloudAssuredworkloadsV1Workload(name=name)
          for name in names]


class YieldFromListTest(test_case.Base):

  def SetUp(self):
    self.method = mock.Mock()
    self.method.side_effect = [
        messages.GoogleCloudAssuredworkloadsV1ListWorkloadsResponse(
            workloads=_Workloads('a', 'b'), nextPageToken='t1'),
        messages.GoogleCloudAssuredworkloadsV1ListWorkloadsResponse(
            workloads=_Workloads('c'), nextPageToken='t2'),
        messages.GoogleCloudAssuredworkloadsV1ListWorkloadsResponse(
            workloads=_Workloads('d')),
    ]

  def testAllPages(self):
    results = list(list_pager.YieldFromList(
        self.method, _PARENT, field='workloads', filter='state=ACTIVE'))
    self.assertEqual(['a', 'b', 'c', 'd'], [w.name for w in results])
    self.assertEqual([
        mock.call(_PARENT, filter='state=ACTIVE'),
        mock.call(_PARENT, filter='state=ACTIVE', pageToken='t1'),
        mock.call(_PARENT, filter='state=ACTIVE', pageToken='t2'),
    ], self.method.call_args_list)

  def testLimit(self):
    results = list(list_pager.YieldFromList(
        self.method, _PARENT, field='workloads', limit=3, batch_size=2))
    self.assertEqual(['a', 'b', 'c'], [w.name for w in results])
    self.assertEqual([
        mock.call(_PARENT, pageSize=2),
        mock.call(_PARENT, pageSize=1, pageToken='t1'),
    ], self.method.call_args_list)

  def testLimitWithinFirstPage(self):
    results = list(list_pager.YieldFromList(
        self.method, _PARENT, field='workloads', limit=1))
    self.assertEqual(['a'], [w.name for w in results])
    self.assertEqual(1, self.method.call_count)

  def testPredicate(self):
    results = list(list_pager.YieldFromList(
        self.method, _PARENT, field='workloads',
        predicate=lambda w: w.name != 'b'))
    self.assertEqual(['a', 'c', 'd'], [w.name for w in results])

  def testNoBatchSizeAttribute(self):
    list(list_pager.YieldFromList(
        self.method, _PARENT, field='workloads', batch_size=5,
        batch_size_attribute=None))
    self.assertEqual(mock.call(_PARENT), self.method.call_args_list[0])
