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
"""Reads the Discovery directory service and the documents it lists."""

from gapis.api_lib.regen import discovery
from gapis.core import exceptions
from gapis.core import log
from gapis.core import requests as core_requests
import requests


DISCOVERY_DIRECTORY_URL = 'https://www.googleapis.com/discovery/v1/apis'


class Error(exceptions.Error):
  """Errors raised by this module."""


class FetchError(Error):
  """A Discovery resource could not be read."""


class DirectoryItem(object):
  """One API version listed by the directory service."""

  def __init__(self, item):
    self.name = item.get('name', '')
    self.version = item.get('version', '')
    self.title = item.get('title', '')
    self.description = item.get('description', '')
    self.discovery_rest_url = item.get('discoveryRestUrl', '')
    self.preferred = item.get('preferred', False)

  def __repr__(self):
    return 'DirectoryItem({0}/{1})'.format(self.name, self.version)


def _GetJson(url, params=None, session=None):
  session = session or core_requests.GetSession()
  try:
    response = session.get(url, params=params)
  except requests.RequestException as e:
    raise FetchError('Unable to fetch [{0}]: {1}'.format(url, e))
  if response.status_code != 200:
    raise FetchError('Unable to fetch [{0}]: HTTP {1}'.format(
        url, response.status_code))
  try:
    return response.json()
  except ValueError as e:
    raise FetchError('Response of [{0}] is not JSON: {1}'.format(url, e))


def ListApis(preferred=True, session=None):
  """Lists the APIs of the Discovery directory.

  Args:
    preferred: bool, Only list the preferred version of each API.
    session: requests.Session, Sends the request.

  Returns:
    [DirectoryItem], The listed API versions.

  Raises:
    FetchError: If the directory cannot be read.
  """
  params = {'preferred': 'true'} if preferred else None
  directory = _GetJson(DISCOVERY_DIRECTORY_URL, params=params, session=session)
  return [DirectoryItem(item) for item in directory.get('items', [])]


def FetchDocument(url, session=None):
  """Returns the discovery.DiscoveryDoc served at url."""
  return discovery.DiscoveryDoc.FromDict(_GetJson(url, session=session))


def FetchAll(items, session=None):
  """Fetches the Discovery document of every item.

  A failing item is logged and skipped; the others are still fetched.

  Args:
    items: [DirectoryItem], The API versions to fetch.
    session: requests.Session, Sends the requests.

  Returns:
    ([discovery.DiscoveryDoc], [(DirectoryItem, Error)]), The documents and
    the failures.
  """
  documents = []
  failures = []
  for item in items:
    try:
      documents.append(FetchDocument(item.discovery_rest_url, session=session))
    except FetchError as e:
      log.warning('Skipping [%s %s]: %s', item.name, item.version, e)
      failures.append((item, e))
  return documents, failures
