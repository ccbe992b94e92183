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
"""Wrappers around the generator used by the regen_apis tool."""

import logging
import os

from gapis.api_lib.regen import discovery_fetcher
from gapis.api_lib.regen import generate
from gapis.api_lib.regen import naming
from gapis.core import exceptions


def _RootPackage(root_dir):
  return os.path.normpath(root_dir).replace(os.sep, '.')


def GenerateApi(base_dir, root_dir, api_name, api_version, api_config):
  """Generates the client of one configured api version."""
  discovery_doc = os.path.join(base_dir, root_dir, api_config['discovery_doc'])
  api_version_in_targets = api_config.get('version', api_version)
  logging.debug('Generating %s %s from %s', api_name, api_version_in_targets,
                discovery_doc)
  generate.GenerateApi(discovery_doc, os.path.join(base_dir, root_dir),
                       _RootPackage(root_dir), api_name,
                       api_version_in_targets)


def GenerateApiMap(base_dir, root_dir, apis_config):
  """Writes root_dir/apis_map.py for every configured api version."""
  root_package = _RootPackage(root_dir)
  package_map = {}
  for api_name, api_version_config in apis_config.items():
    package_map[api_name] = {
        api_version: root_package for api_version in api_version_config}
  generate.GenerateApiMap(os.path.join(base_dir, root_dir, 'apis_map.py'),
                          package_map, apis_config)


def GenerateFromDirectory(output_dir, root_package, index_file=None,
                          session=None):
  """Generates every preferred api listed by the Discovery directory.

  An api that cannot be fetched or generated is logged and skipped.

  Args:
    output_dir: str, The directory of root_package.
    root_package: str, The package the clients are generated into.
    index_file: str, Where to write the HTML index of the generated apis.
    session: requests.Session, Sends the Discovery requests.

  Returns:
    ([discovery.DiscoveryDoc], [(object, Exception)]), The generated apis and
    the failures.
  """
  items = discovery_fetcher.ListApis(preferred=True, session=session)
  logging.info('Discovery directory lists %d apis', len(items))
  documents, failures = discovery_fetcher.FetchAll(items, session=session)
  generated = []
  for doc in documents:
    api_version = naming.PythonIdentifier(doc.api_version)
    try:
      generate.GenerateApi(doc, output_dir, root_package,
                           doc.api_name, api_version)
    except exceptions.Error as e:
      logging.error('Failed to generate %s %s: %s', doc.api_name,
                    doc.api_version, e)
      failures.append((doc, e))
      continue
    generated.append(doc)
  if index_file:
    generate.GenerateIndex(index_file, generated, root_package)
  return generated, failures
