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
"""Tests for the discovery_fetcher module."""

from unittest import mock

from gapis.api_lib.regen import discovery_fetcher
from gapis.tests.lib import test_case
import requests


_DIRECTORY = {
    'kind': 'discovery#directoryList',
    'items': [
        {
            'name': 'fruits',
            'version': 'v1',
            'title': 'Fruit Basket API',
            'discoveryRestUrl':
                'https://fruits.googleapis.com/$discovery/rest?version=v1',
            'preferred': True,
        },
        {
            'name': 'pears',
            'version': 'v2',
            'title': 'Pears API',
            'discoveryRestUrl':
                'https://pears.googleapis.com/$discovery/rest?version=v2',
            'preferred': True,
        },
    ],
}


class ListApisTest(test_case.Base):

  def testListPreferred(self):
    session = self.MakeSession(self.MakeResponse(_DIRECTORY))
    items = discovery_fetcher.ListApis(session=session)
    session.get.assert_called_once_with(
        discovery_fetcher.DISCOVERY_DIRECTORY_URL,
        params={'preferred': 'true'})
    self.assertEqual(['fruits', 'pears'], [i.name for i in items])
    self.assertEqual('v1', items[0].version)
    self.assertEqual('Fruit Basket API', items[0].title)
    self.assertEqual(
        'https://fruits.googleapis.com/$discovery/rest?version=v1',
        items[0].discovery_rest_url)
    self.assertTrue(items[0].preferred)

  def testListAll(self):
    session = self.MakeSession(self.MakeResponse({}))
    self.assertEqual([], discovery_fetcher.ListApis(preferred=False,
                                                    session=session))
    session.get.assert_called_once_with(
        discovery_fetcher.DISCOVERY_DIRECTORY_URL, params=None)

  def testDefaultSession(self):
    session = self.MakeSession(self.MakeResponse(_DIRECTORY))
    get_session = self.StartPatch('gapis.core.requests.GetSession',
                                  return_value=session)
    self.assertEqual(2, len(discovery_fetcher.ListApis()))
    get_session.assert_called_once_with()

  def testHttpError(self):
    session = self.MakeSession(self.MakeResponse('Not Found', 404))
    with self.assertRaisesRegex(discovery_fetcher.FetchError, 'HTTP 404'):
      discovery_fetcher.ListApis(session=session)

  def testConnectionError(self):
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError('no route')
    with self.assertRaisesRegex(discovery_fetcher.FetchError, 'no route'):
      discovery_fetcher.ListApis(session=session)

  def testNotJson(self):
    session = self.MakeSession(self.MakeResponse('<html>'))
    with self.assertRaisesRegex(discovery_fetcher.FetchError, 'is not JSON'):
      discovery_fetcher.ListApis(session=session)


class FetchAllTest(test_case.Base):

  def testSkipsFailures(self):
    session = self.MakeSession(
        self.MakeResponse({'name': 'fruits', 'version': 'v1'}),
        self.MakeResponse('Server Error', 500))
    items = [discovery_fetcher.DirectoryItem(item)
             for item in _DIRECTORY['items']]

    documents, failures = discovery_fetcher.FetchAll(items, session=session)

    self.assertEqual([('fruits', 'v1')],
                     [(d.api_name, d.api_version) for d in documents])
    self.assertEqual(1, len(failures))
    item, error = failures[0]
    self.assertEqual('pears', item.name)
    self.assertIsInstance(error, discovery_fetcher.FetchError)
    self.assertIn('Skipping [pears v2]', self.GetErr())
    self.assertEqual(
        [mock.call(items[0].discovery_rest_url, params=None),
         mock.call(items[1].discovery_rest_url, params=None)],
        session.get.call_args_list)
