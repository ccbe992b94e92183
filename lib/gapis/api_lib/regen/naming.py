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
"""Python names for the parts of a Discovery document."""

import keyword
import re

from gapis.core import exceptions


# Attributes of protorpclite messages that a field must not shadow.
_MESSAGE_RESERVED = frozenset([
    'all_fields', 'all_unrecognized_fields', 'check_initialized',
    'field_by_name', 'field_by_number', 'get_assigned_value',
    'get_unrecognized_field_info', 'is_initialized', 'reset',
    'set_unrecognized_field',
])
# Attributes of protorpclite enums that a value must not shadow.
_ENUM_RESERVED = frozenset([
    'def_name', 'definition_name', 'definition_package', 'lookup_by_name',
    'lookup_by_number', 'name', 'names', 'number', 'numbers', 'to_dict',
])
# Locals of a generated client method.
_PARAM_RESERVED = frozenset(['config', 'request', 'self'])

_NON_IDENTIFIER_RE = re.compile(r'[^0-9A-Za-z_]')
_WORD_SPLIT_RE = re.compile(r'[^0-9A-Za-z]+')


class Error(exceptions.Error):
  """Errors raised by this module."""


class ConflictingMethodName(Error):
  """Two endpoints of an API flatten to the same method name."""


def PythonIdentifier(name, reserved=()):
  """Returns a valid Python identifier for name.

  Characters that cannot appear in an identifier become '_', a leading digit
  gets a '_' prefix, and keywords or reserved names get a '_' suffix.

  Args:
    name: str, The name from the Discovery document.
    reserved: set(str), Names that must not be returned as is.

  Returns:
    str, The identifier.
  """
  identifier = _NON_IDENTIFIER_RE.sub('_', name)
  if not identifier or identifier[0].isdigit():
    identifier = '_' + identifier
  while keyword.iskeyword(identifier) or identifier in reserved:
    identifier += '_'
  return identifier


def FieldName(name):
  return PythonIdentifier(name, _MESSAGE_RESERVED)


def EnumValueName(name):
  return PythonIdentifier(name, _ENUM_RESERVED)


def ParamName(name):
  return PythonIdentifier(name, _PARAM_RESERVED)


def AssignUniqueNames(wire_names, name_func):
  """Maps each wire name to a distinct Python name.

  Wire names that name_func leaves unchanged keep their name. The others get
  name_func(wire_name), with _2, _3... appended when that name is taken, so
  foo_bar and foo-bar become foo_bar and foo_bar_2.

  Args:
    wire_names: [str], The names from the Discovery document.
    name_func: func(str) -> str, Cleans up a single name, e.g. FieldName.

  Returns:
    {str: str}, The Python name of each wire name.
  """
  result = {}
  taken = set()
  for wire_name in wire_names:
    if name_func(wire_name) == wire_name:
      result[wire_name] = wire_name
      taken.add(wire_name)
  for wire_name in wire_names:
    if wire_name in result:
      continue
    base = name = name_func(wire_name)
    suffix = 2
    while name in taken:
      name = '{0}_{1}'.format(base, suffix)
      suffix += 1
    result[wire_name] = name
    taken.add(name)
  return result


def CamelCase(name):
  """Upper cases the first letter of each word and drops the separators.

  For example, mutatePartnerPermissions becomes MutatePartnerPermissions and
  interval.endTime becomes IntervalEndTime.

  Args:
    name: str, The name to convert.

  Returns:
    str, The CamelCase name.
  """
  return ''.join(part[:1].upper() + part[1:]
                 for part in _WORD_SPLIT_RE.split(name) if part)


def ClientClassName(api_name, api_version):
  """Returns the client class name, e.g. AssuredworkloadsV1."""
  return ''.join(
      part.capitalize() for part in (api_name.split('_') +
                                     api_version.split('_')))


def PrimaryName(api_name, title_words):
  """Returns the exported alias of a client, taken from its title.

  The leading title words whose letters spell api_name are joined, so
  assuredworkloads with the title 'Assured Workloads API' gives
  AssuredWorkloads. When the title does not spell the name, the CamelCase api
  name is used.

  Args:
    api_name: str, The Discovery name of the API.
    title_words: [str], The words of the Discovery title.

  Returns:
    str, The alias.
  """
  target = api_name.lower()
  words = [_NON_IDENTIFIER_RE.sub('', w) for w in title_words or []]
  for i in range(1, len(words) + 1):
    candidate = ''.join(words[:i])
    if candidate.lower() == target:
      return ''.join(w[:1].upper() + w[1:] for w in words[:i])
    if not target.startswith(candidate.lower()):
      break
  return CamelCase(api_name)


def MethodName(resource_path, method_name):
  """Returns the flattened method name.

  Args:
    resource_path: [str], The nested resource names, e.g.
      ['organizations', 'locations', 'workloads'].
    method_name: str, The method name within the resource, e.g. list.

  Returns:
    str, The method name, e.g. OrganizationsLocationsWorkloadsList.
  """
  return ''.join(CamelCase(part) for part in
                 list(resource_path) + [method_name])


def CheckMethodNames(methods):
  """Raises ConflictingMethodName if two methods share a flattened name.

  Args:
    methods: [discovery.Method], The methods of an API.
  """
  seen = {}
  for method in methods:
    name = MethodName(method.resource_path, method.name)
    if name in seen:
      raise ConflictingMethodName(
          'Methods [{0}] and [{1}] both map to [{2}].'.format(
              seen[name], method.method_id, name))
    seen[name] = method.method_id
