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
"""Access to the parts of a Discovery document the generator uses."""

import json

from gapis.core import exceptions
from gapis.core.util import files


class Error(exceptions.Error):
  """Errors raised by this module."""


class UnsupportedDiscoveryDoc(Error):
  """Raised when some unsupported feature is detected."""


class Method(object):
  """One REST method of a Discovery document.

  Attributes:
    resource_path: [str], The names of the nested resources holding the
      method, outermost first.
    name: str, The method name within its resource.
    method_id: str, The Discovery id.
    http_method: str, The HTTP verb.
    path: str, The path template relative to the service path.
    description: str, What the method does.
    parameters: {str: dict}, The parameter schemas by wire name.
    parameter_order: [str], The required parameters in call order.
    request_ref: str, The schema of the request body, or None.
    response_ref: str, The schema of the response body, or None.
    scopes: [str], The OAuth2 scopes of the method.
  """

  def __init__(self, resource_path, name, method_dict):
    self.resource_path = list(resource_path)
    self.name = name
    self.method_id = method_dict.get('id', '')
    self.http_method = method_dict.get('httpMethod', 'GET')
    self.path = method_dict.get('path', '')
    self.flat_path = method_dict.get('flatPath', self.path)
    self.description = method_dict.get('description', '')
    self.parameters = method_dict.get('parameters', {})
    self.parameter_order = list(method_dict.get('parameterOrder', []))
    self.request_ref = method_dict.get('request', {}).get('$ref')
    self.response_ref = method_dict.get('response', {}).get('$ref')
    self.scopes = list(method_dict.get('scopes', []))

  def _Location(self, name):
    return self.parameters.get(name, {}).get('location')

  @property
  def ordered_params(self):
    """Required parameters in call order, path parameters always included."""
    ordered = [p for p in self.parameter_order if p in self.parameters]
    ordered.extend(p for p in self.parameters
                   if p not in ordered and self._Location(p) == 'path')
    return ordered

  @property
  def path_params(self):
    return [p for p in self.ordered_params if self._Location(p) == 'path']

  @property
  def query_params(self):
    return [p for p in self.parameters if self._Location(p) == 'query']

  def __repr__(self):
    return 'Method({0})'.format(self.method_id)


class DiscoveryDoc(object):
  """Encapsulates access to discovery doc."""

  def __init__(self, discovery_doc_dict):
    self._discovery_doc_dict = discovery_doc_dict

  @classmethod
  def FromJson(cls, path):
    try:
      return cls(json.loads(files.ReadFileContents(path)))
    except ValueError as e:
      raise UnsupportedDiscoveryDoc(
          'Discovery document [{0}] is not valid JSON: {1}'.format(path, e))

  @classmethod
  def FromDict(cls, discovery_doc_dict):
    return cls(discovery_doc_dict)

  def AsDict(self):
    return self._discovery_doc_dict

  @property
  def api_name(self):
    return self._discovery_doc_dict['name']

  @property
  def api_version(self):
    return self._discovery_doc_dict['version']

  @property
  def title(self):
    return self._discovery_doc_dict.get('title', '')

  @property
  def description(self):
    return self._discovery_doc_dict.get('description', '')

  @property
  def docs_url(self):
    return self._discovery_doc_dict.get('documentationLink', '')

  @property
  def revision(self):
    return self._discovery_doc_dict.get('revision', '')

  @property
  def root_url(self):
    return self._discovery_doc_dict.get('rootUrl', '')

  @property
  def service_path(self):
    return self._discovery_doc_dict.get('servicePath', '')

  @property
  def base_url(self):
    return (self._discovery_doc_dict.get('baseUrl') or
            self.root_url + self.service_path)

  @property
  def mtls_root_url(self):
    return self._discovery_doc_dict.get('mtlsRootUrl', '')

  @property
  def mtls_base_url(self):
    if not self.mtls_root_url:
      return ''
    return self.mtls_root_url + self.service_path

  @property
  def scopes(self):
    auth = self._discovery_doc_dict.get('auth', {})
    return sorted(auth.get('oauth2', {}).get('scopes', {}))

  @property
  def schemas(self):
    return self._discovery_doc_dict.get('schemas', {})

  @property
  def parameters(self):
    """The global query parameters accepted by every method."""
    return self._discovery_doc_dict.get('parameters', {})

  @property
  def methods(self):
    """All methods, flattened depth first through the nested resources."""
    result = []
    _CollectMethods([], self._discovery_doc_dict, result)
    return result

  def Validate(self):
    """Checks every $ref of the document names a schema.

    Raises:
      UnsupportedDiscoveryDoc: If a $ref names an unknown schema.
    """
    schemas = self.schemas
    for name, schema in sorted(schemas.items()):
      for ref in _FindRefs(schema):
        if ref not in schemas:
          raise UnsupportedDiscoveryDoc(
              'Schema [{0}] refers to unknown schema [{1}].'.format(name, ref))
    for method in self.methods:
      for ref in (method.request_ref, method.response_ref):
        if ref and ref not in schemas:
          raise UnsupportedDiscoveryDoc(
              'Method [{0}] refers to unknown schema [{1}].'.format(
                  method.method_id, ref))


def _CollectMethods(resource_path, node, result):
  for name, method_dict in sorted(node.get('methods', {}).items()):
    result.append(Method(resource_path, name, method_dict))
  for name, resource in sorted(node.get('resources', {}).items()):
    _CollectMethods(resource_path + [name], resource, result)


def _FindRefs(schema):
  """Yields every $ref nested in schema."""
  if isinstance(schema, dict):
    for key, value in schema.items():
      if key == '$ref' and isinstance(value, str):
        yield value
      else:
        for ref in _FindRefs(value):
          yield ref
  elif isinstance(schema, list):
    for item in schema:
      for ref in _FindRefs(item):
        yield ref
