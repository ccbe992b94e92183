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
"""Looks up generated API clients and messages modules by API name.

  client = apis.GetClientInstance('assuredworkloads', 'v1')
  messages = apis.GetMessagesModule('assuredworkloads', 'v1')

The registry is apis_map.MAP, generated next to the clients. API names may be
given by their alias, see apis_util.
"""

import importlib

from gapis.api_lib.util import apis_util
from gapis.core import properties
from gapis.generated_clients.apis import apis_map

_GENERATED_PACKAGE = 'gapis.generated_clients.apis'


def _CanonicalName(api_name):
  # pylint:disable=protected-access
  return apis_util._API_NAME_ALIASES.get(api_name, api_name)


def _Versions(api_name):
  """Returns the {version: APIDef} map of api_name."""
  versions = apis_map.MAP.get(_CanonicalName(api_name))
  if versions is None:
    raise apis_util.UnknownAPIError(api_name)
  return versions


def _DefaultVersion(api_name):
  for version, api_def in _Versions(api_name).items():
    if api_def.default_version:
      return version
  return None


def GetApiNames():
  """Returns the sorted names of the registered APIs."""
  return sorted(apis_map.MAP)


def GetVersions(api_name):
  """Returns the registered versions of api_name.

  Raises:
    UnknownAPIError: api_name is not registered.
  """
  return list(_Versions(api_name))


def ConstructApiDef(api_name, api_version, is_default,
                    base_pkg=_GENERATED_PACKAGE):
  """Builds the APIDef of a generated client laid out by the regen tool.

  The client of fruits v1 is base_pkg.fruits.v1.fruits_v1_client.FruitsV1 and
  its messages are in base_pkg.fruits.v1.fruits_v1_messages.

  Args:
    api_name: str, The API name.
    api_version: str, The API version.
    is_default: bool, Whether the version is the default of the API.
    base_pkg: str, The package holding the generated clients.

  Returns:
    apis_map.APIDef, The definition.
  """
  api_name = _CanonicalName(api_name)
  prefix = '{0}_{1}_'.format(api_name, api_version)
  client_class = ''.join(
      part.capitalize() for part in (api_name + '_' + api_version).split('_'))
  return apis_map.APIDef(
      '.'.join([base_pkg, api_name, api_version]),
      prefix + 'client.' + client_class,
      prefix + 'messages',
      is_default)


def AddToApisMap(api_name, api_version, default=None,
                 base_pkg=_GENERATED_PACKAGE):
  """Registers a generated client at runtime.

  Args:
    api_name: str, The API name.
    api_version: str, The API version.
    default: bool, Whether the version is the default of the API. None makes
      it the default only when it is the first version registered.
    base_pkg: str, The package holding the generated clients.
  """
  api_name = _CanonicalName(api_name)
  versions = apis_map.MAP.setdefault(api_name, {})
  if default is None:
    default = not versions
  versions[api_version] = ConstructApiDef(api_name, api_version, default,
                                          base_pkg)


def SetDefaultVersion(api_name, api_version):
  """Makes api_version the only default version of api_name."""
  chosen = GetApiDef(api_name, api_version)
  for api_def in _Versions(api_name).values():
    api_def.default_version = api_def is chosen


def ResolveVersion(api_name, default_override=None):
  """Returns the version of api_name to use.

  The api_client_overrides/<api_name> property wins over default_override,
  which wins over the registered default version.

  Args:
    api_name: str, The API name or alias.
    default_override: str, The version the caller prefers.

  Raises:
    UnknownAPIError: api_name is not registered.
  """
  _Versions(api_name)
  override = properties.VALUES.api_client_overrides.AllValues().get(api_name)
  return override or default_override or _DefaultVersion(api_name)


def GetApiDef(api_name, api_version):
  """Returns the APIDef of api_name at api_version.

  Raises:
    UnknownAPIError: api_name is not registered.
    UnknownVersionError: api_version is not registered for api_name.
  """
  versions = _Versions(api_name)
  if api_version not in versions:
    raise apis_util.UnknownVersionError(_CanonicalName(api_name), api_version)
  return versions[api_version]


def GetClientClass(api_name, api_version):
  """Imports and returns the generated client class."""
  module_path, class_name = GetApiDef(
      api_name, api_version).client_full_classpath.rsplit('.', 1)
  return getattr(importlib.import_module(module_path), class_name)


def GetMessagesModule(api_name, api_version):
  """Imports and returns the generated messages module."""
  return importlib.import_module(
      GetApiDef(api_name, api_version).messages_full_modulepath)


def GetEffectiveApiEndpoint(api_name, api_version, client_class=None):
  """Returns the api_endpoint_overrides/<api> property or the client BASE_URL.

  Args:
    api_name: str, The API name.
    api_version: str, The API version.
    client_class: type, The client class, imported when None.
  """
  override = properties.VALUES.api_endpoint_overrides.Property(
      _CanonicalName(api_name)).Get()
  if override:
    return override
  return (client_class or GetClientClass(api_name, api_version)).BASE_URL


def GetClientInstance(api_name, api_version, no_http=False, session=None,
                      check_response_func=None):
  """Returns a client of api_name at api_version configured from properties.

  The client talks to GetEffectiveApiEndpoint() and, when core/api_key is
  set, sends the key with every request.

  Args:
    api_name: str, The API name.
    api_version: str, The API version.
    no_http: bool, Send requests without credentials.
    session: requests.Session, Sends the requests of the client. Not allowed
      together with no_http.
    check_response_func: f(requests.Response), Called with every response
      before its status is checked.

  Raises:
    ValueError: Both no_http and session are given.

  Returns:
    base_api.BaseApiClient, The client.
  """
  if no_http and session is not None:
    raise ValueError('A session cannot be used with no_http=True.')
  client_class = GetClientClass(api_name, api_version)
  client = client_class(
      url=GetEffectiveApiEndpoint(api_name, api_version, client_class),
      get_credentials=not no_http,
      session=session,
      check_response_func=check_response_func)
  api_key = properties.VALUES.core.api_key.Get()
  if api_key:
    client.AddGlobalParam('key', api_key)
    client.additional_http_headers['X-Goog-Project-Override'] = 'apikey'
  return client
