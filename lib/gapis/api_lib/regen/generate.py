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
"""Generates client modules, the apis map and the index of services."""

import collections
import importlib
import logging
import os

from gapis.api_lib.regen import api_def
from gapis.api_lib.regen import discovery
from gapis.api_lib.regen import message_printer
from gapis.api_lib.regen import naming
from gapis.core import exceptions
from gapis.core.util import files
from mako import runtime
from mako import template


_INIT_FILE_CONTENT = """\
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

"""

_LINE_WIDTH = 80
_TEMPLATE_DIR = os.path.dirname(__file__)


class NoDefaultApiError(exceptions.Error):
  """An api has no default version configured, or more than one."""


class WrongDiscoveryDocError(exceptions.Error):
  """The Discovery document describes a different api."""


def _ListSource(values, prefix, suffix, indent):
  """Returns the source of a list literal, one item per line if too long."""
  values = list(values)
  line = '{0}{1}{2!r}{3}'.format(indent, prefix, values, suffix)
  if len(line) <= _LINE_WIDTH:
    return line
  lines = ['{0}{1}['.format(indent, prefix)]
  lines.extend('{0}    {1!r},'.format(indent, v) for v in values)
  lines.append('{0}]{1}'.format(indent, suffix))
  return '\n'.join(lines)


def _ParamTypeName(param):
  """Returns the Python type documented for a method parameter."""
  param_type = param.get('type', 'string')
  param_format = param.get('format')
  if param_format in ('date-time', 'google-datetime'):
    name = 'datetime.datetime'
  elif param_type == 'integer' or param_format in ('int64', 'uint64'):
    name = 'int'
  elif param_type == 'number':
    name = 'float'
  elif param_type == 'boolean':
    name = 'bool'
  else:
    name = 'str'
  if param.get('repeated'):
    return '[{0}]'.format(name)
  return name


def _Signature(name, args):
  """Returns the def line(s) of a client method, wrapped to the line width."""
  prefix = '  def {0}('.format(name)
  one_line = prefix + ', '.join(args) + '):'
  if len(one_line) <= _LINE_WIDTH:
    return one_line
  lines = [prefix]
  current = '      '
  for i, arg in enumerate(args):
    piece = arg + ('):' if i == len(args) - 1 else ',')
    if len(current) + len(piece) + 1 > _LINE_WIDTH and current.strip():
      lines.append(current.rstrip())
      current = '      '
    current += piece + ' '
  lines.append(current.rstrip())
  return '\n'.join(lines)


class _MethodView(object):
  """What the client template needs to know about one method."""

  def __init__(self, method, schemas):
    self.name = naming.MethodName(method.resource_path, method.name)
    self.method_id = method.method_id
    self.http_method = method.http_method
    self.relative_path = method.path
    self.ordered_params = method.ordered_params
    self.path_params = method.path_params
    self.query_params = method.query_params
    self.request_type_name = method.request_ref
    self.response_type_name = method.response_ref
    self.has_request = bool(method.request_ref)

    py_names = {p: naming.ParamName(p) for p in method.parameters}
    self.path_args = [(p, py_names[p]) for p in self.path_params]
    self.query_args = [(p, py_names[p]) for p in self.query_params]

    positional = [py_names[p] for p in self.ordered_params]
    if self.has_request:
      positional.append('request')
    optional = ['{0}=None'.format(py_names[p]) for p in self.query_params
                if p not in self.ordered_params]
    self.signature = _Signature(self.name, ['self'] + positional + optional)
    config_call = "self.GetMethodConfig('{0}')".format(self.name)
    if len(config_call) + 13 > _LINE_WIDTH:
      config_call = "self.GetMethodConfig(\n        '{0}')".format(self.name)
    self.config_source = '    config = ' + config_call

    arg_docs = []
    for p in self.ordered_params:
      arg_docs.append(self._ArgDoc(py_names[p], method.parameters[p]))
    if self.has_request:
      arg_docs.append(('request', '({0}) {1}'.format(
          method.request_ref,
          schemas.get(method.request_ref, {}).get('description') or
          'The request body.')))
    for p in self.query_params:
      if p not in self.ordered_params:
        arg_docs.append(self._ArgDoc(py_names[p], method.parameters[p]))
    if self.response_type_name:
      returns = [(None, '({0}) The response message.'.format(
          self.response_type_name))]
    else:
      returns = [(None, 'None')]

    printer = message_printer.SourcePrinter()
    with printer.Indent():
      with printer.Indent():
        message_printer.PrintDocstring(
            printer, method.description or 'Calls {0}.'.format(
                method.method_id),
            [('Args', arg_docs), ('Returns', returns)])
    self.docstring = printer.Source().rstrip('\n')

  @staticmethod
  def _ArgDoc(py_name, param):
    return py_name, '({0}) {1}'.format(_ParamTypeName(param),
                                      param.get('description', ''))


def _RenderTemplate(template_name, output_file, **context):
  tpl = template.Template(
      filename=os.path.join(_TEMPLATE_DIR, template_name))
  with files.FileWriter(output_file) as output:
    ctx = runtime.Context(output, **context)
    tpl.render_context(ctx)


def GenerateApi(discovery_doc, output_dir, root_package, api_name,
                api_version):
  """Writes the messages and client modules of an API version.

  Args:
    discovery_doc: str or discovery.DiscoveryDoc, The Discovery document or
      the path to it.
    output_dir: str, The directory of root_package. Modules land in
      output_dir/api_name/api_version.
    root_package: str, The package output_dir holds, e.g.
      gapis.generated_clients.apis.
    api_name: str, The name of the api.
    api_version: str, The version of the api.

  Raises:
    WrongDiscoveryDocError: If the document describes another api.
    discovery.UnsupportedDiscoveryDoc: If the document cannot be generated.
    naming.ConflictingMethodName: If two methods get the same name.
  """
  if not isinstance(discovery_doc, discovery.DiscoveryDoc):
    discovery_doc = discovery.DiscoveryDoc.FromJson(discovery_doc)
  if discovery_doc.api_name != api_name:
    raise WrongDiscoveryDocError(
        'Discovery document is for api [{0}], expected [{1}].'.format(
            discovery_doc.api_name, api_name))
  if discovery_doc.api_version != api_version:
    logging.warning('Discovery api version %s does not match %s, generating '
                    'it as %s.', discovery_doc.api_version, api_version,
                    api_version)
  discovery_doc.Validate()
  methods = discovery_doc.methods
  naming.CheckMethodNames(methods)

  api_dir = os.path.join(output_dir, api_name, api_version)
  package = '.'.join([root_package, api_name, api_version])
  module_prefix = '_'.join([api_name, api_version])

  messages_file = os.path.join(api_dir, module_prefix + '_messages.py')
  logging.debug('Generating messages module at %s', messages_file)
  files.WriteFileContents(
      messages_file,
      message_printer.MessagesModuleSource(
          discovery_doc, api_name, license_header=_INIT_FILE_CONTENT))

  client_file = os.path.join(api_dir, module_prefix + '_client.py')
  logging.debug('Generating client module at %s', client_file)
  client_class_name = naming.ClientClassName(api_name, api_version)
  _RenderTemplate(
      'client.tpl', client_file,
      license_header=_INIT_FILE_CONTENT.rstrip('\n'),
      doc=discovery_doc,
      api_name=api_name,
      api_version=api_version,
      package=package,
      messages_module=module_prefix + '_messages',
      client_class_name=client_class_name,
      primary_name=naming.PrimaryName(discovery_doc.api_name,
                                      discovery_doc.title.split()),
      methods=[_MethodView(m, discovery_doc.schemas) for m in methods],
      list_source=_ListSource)

  _WritePackageInits(output_dir, [api_name, api_version])


def _WritePackageInits(output_dir, subpackages):
  """Makes output_dir and output_dir/subpackages... importable packages."""
  package_dir = os.path.normpath(output_dir)
  for subpackage in [None] + subpackages:
    if subpackage:
      package_dir = os.path.join(package_dir, subpackage)
    init_file = os.path.join(package_dir, '__init__.py')
    if os.path.isfile(init_file):
      continue
    logging.warning('Writing missing %s', init_file)
    files.WriteFileContents(init_file, _INIT_FILE_CONTENT)


def _ImportBaseUrl(definition):
  """Returns the BASE_URL of the client of definition, '' if not importable."""
  module_path, class_name = definition.client_full_classpath.rsplit('.', 1)
  try:
    return getattr(importlib.import_module(module_path), class_name).BASE_URL
  except (ImportError, AttributeError):
    logging.debug('Cannot import %s, leaving its base_url empty',
                  definition.client_full_classpath)
    return ''


def _DefaultVersions(apis_config):
  """Returns {api_name: default_version} of the configured apis.

  An api with a single version defaults to it, otherwise exactly one version
  must be configured with default: true.

  Raises:
    NoDefaultApiError: An api has no default version, or more than one.
  """
  defaults = {}
  for api_name, versions in apis_config.items():
    chosen = [v for v, api_config in versions.items()
              if api_config.get('default') or len(versions) == 1]
    if len(chosen) > 1:
      raise NoDefaultApiError(
          'Multiple default client versions found for [{0}]: {1}'.format(
              api_name, ', '.join(sorted(chosen))))
    if chosen:
      defaults[api_name] = chosen[0]
  missing = sorted(set(apis_config) - set(defaults))
  if missing:
    raise NoDefaultApiError(
        'No default client versions found for [{0}]. Mark one version of '
        'each with default: true.'.format(', '.join(missing)))
  return defaults


def _MakeApiMap(package_map, apis_config):
  """Returns {api_name: {api_version: APIDef}} of the generated apis.

  Args:
    package_map: {api_name: {api_version: root_package}}, Where each api
      version was generated. Versions missing from it are left out.
    apis_config: {api_name: {api_version: api_config}}, The regeneration
      config of every api.

  Raises:
    NoDefaultApiError: An api has no default version, or more than one.
  """
  defaults = _DefaultVersions(apis_config)
  apis_map = collections.defaultdict(dict)
  for api_name, versions in apis_config.items():
    for api_version in versions:
      root_package = package_map.get(api_name, {}).get(api_version)
      if root_package is None:
        continue
      definition = api_def.APIDef(
          '.'.join([root_package, api_name, api_version]),
          '{0}_{1}_client.{2}'.format(
              api_name, api_version,
              naming.ClientClassName(api_name, api_version)),
          '{0}_{1}_messages'.format(api_name, api_version),
          api_version == defaults[api_name])
      definition.base_url = _ImportBaseUrl(definition)
      apis_map[api_name][api_version] = definition
  return apis_map


def GenerateApiMap(output_file, package_map, apis_config):
  """Writes the apis_map.py registry of the generated apis.

  The module holds the source of api_def followed by a MAP of every api
  version.

  Args:
    output_file: str, The file to write.
    package_map: {api_name: {api_version: root_package}}, Where each api
      version was generated.
    apis_config: {api_name: {api_version: api_config}}, The regeneration
      config of every api.
  """
  api_map = _MakeApiMap(package_map, apis_config)
  logging.debug('Writing %s with %s', output_file, dict(api_map))
  source_file = os.path.splitext(api_def.__file__)[0] + '.py'
  _RenderTemplate('apis_map.tpl', output_file,
                  api_def_source=files.ReadFileContents(source_file),
                  apis_map=api_map)


class _ServiceView(object):
  """One row of the services index."""

  def __init__(self, doc, root_package):
    self.title = doc.title or doc.api_name
    self.api_name = doc.api_name
    self.api_version = doc.api_version
    self.description = doc.description
    self.docs_url = doc.docs_url
    version = naming.PythonIdentifier(doc.api_version)
    self.module = '.'.join([
        root_package, doc.api_name, version,
        '{0}_{1}_client'.format(doc.api_name, version)])
    self.primary_name = naming.PrimaryName(doc.api_name, doc.title.split())


def GenerateIndex(output_file, services, root_package):
  """Writes an HTML page listing the generated services.

  Args:
    output_file: str, Path of the page.
    services: [discovery.DiscoveryDoc], The generated APIs.
    root_package: str, The package the clients were generated into.
  """
  logging.debug('Generating index of %d services at %s', len(services),
                output_file)
  rows = sorted((_ServiceView(doc, root_package) for doc in services),
                key=lambda s: (s.api_name, s.api_version))
  _RenderTemplate('index.tpl', output_file, services=rows,
                  root_package=root_package)
