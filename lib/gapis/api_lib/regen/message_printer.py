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
"""Renders the messages module of an API from its Discovery schemas.

The module holds one protorpclite message per schema, laid out the way the
apitools generator lays them out: nested enums and nested map or inline
object messages first, then the numbered fields. Wire names that are not
usable as Python names are registered with encoding at the bottom of the
module.
"""

import contextlib
import textwrap

from gapis.api_lib.regen import discovery
from gapis.api_lib.regen import naming


_LINE_WIDTH = 80
_INDENT = '  '

_INTEGER_VARIANTS = {
    'int32': 'INT32',
    'uint32': 'UINT32',
    'int64': 'INT64',
    'uint64': 'UINT64',
}


class EnumDef(object):
  """A nested enum class."""

  def __init__(self, name, description, values):
    self.name = name
    self.description = description
    # [(python_name, json_name, description)]
    self.values = values


class FieldDef(object):
  """One field of a message class."""

  def __init__(self, name, number, field_class, type_arg=None, variant=None,
               repeated=False, description=''):
    self.name = name
    self.number = number
    self.field_class = field_class
    self.type_arg = type_arg
    self.variant = variant
    self.repeated = repeated
    self.description = description
    self.type_description = description

  def Source(self):
    args = []
    if self.type_arg:
      args.append(self.type_arg)
    args.append(str(self.number))
    if self.variant:
      args.append('variant=_messages.Variant.' + self.variant)
    if self.repeated:
      args.append('repeated=True')
    return '{0} = {1}({2})'.format(self.name, self.field_class, ', '.join(args))


class MessageDef(object):
  """A message class, possibly holding nested definitions."""

  def __init__(self, name, description, is_map=False):
    self.name = name
    self.description = description
    self.is_map = is_map
    self.enums = []
    self.messages = []
    self.fields = []


class _SchemaConverter(object):
  """Builds MessageDefs out of Discovery schemas."""

  def __init__(self, doc):
    self._schemas = doc.schemas
    self.uses_datetime = False
    self.uses_json_value = False
    self.uses_encoding = False
    # [(owner_path, python_name, json_name)]
    self.field_mappings = []
    self.enum_mappings = []

  def Convert(self):
    result = []
    for name in sorted(self._schemas):
      schema = self._schemas[name]
      if schema.get('type', 'object') != 'object':
        raise discovery.UnsupportedDiscoveryDoc(
            'Schema [{0}] has type [{1}], only objects are supported.'.format(
                name, schema.get('type')))
      result.append(self._MakeMessage(name, name, schema))
    return result

  def _MakeMessage(self, name, path, schema):
    description = schema.get('description') or 'A {0} object.'.format(name)
    if 'additionalProperties' in schema:
      return self._MakeMapMessage(name, path, schema, description)
    message = MessageDef(name, description)
    properties = schema.get('properties', {})
    json_names = sorted(properties)
    names = naming.AssignUniqueNames(json_names, naming.FieldName)
    for number, json_name in enumerate(json_names, 1):
      message.fields.append(self._MakeField(
          message, path, names[json_name], json_name, properties[json_name],
          number))
    return message

  def _MakeMapMessage(self, name, path, schema, description):
    self.uses_encoding = True
    message = MessageDef(name, description, is_map=True)
    entry = MessageDef(
        'AdditionalProperty',
        'An additional property for a {0} object.'.format(name))
    entry.fields.append(FieldDef(
        'key', 1, '_messages.StringField',
        description='Name of the additional property.'))
    value = self._MakeField(entry, path + '.AdditionalProperty', 'value',
                            'value', schema['additionalProperties'], 2)
    value.description = value.type_description
    entry.fields.append(value)
    message.messages.append(entry)
    message.fields.append(FieldDef(
        'additionalProperties', 1, '_messages.MessageField',
        type_arg="'AdditionalProperty'", repeated=True,
        description='Properties of the object.'))
    return message

  def _MakeField(self, owner, owner_path, name, json_name, schema, number):
    if name != json_name:
      self.uses_encoding = True
      self.field_mappings.append((owner_path, name, json_name))
    repeated = schema.get('type') == 'array'
    item_schema = schema.get('items', {}) if repeated else schema
    field_class, type_arg, variant, type_description = self._FieldType(
        owner, owner_path, json_name, item_schema, repeated)
    field = FieldDef(
        name, number, field_class, type_arg=type_arg, variant=variant,
        repeated=repeated,
        description=(schema.get('description') or
                     item_schema.get('description') or type_description))
    field.type_description = type_description
    return field

  def _FieldType(self, owner, owner_path, json_name, schema, in_list):
    """Returns (field class, type argument, variant, description)."""
    if '$ref' in schema:
      ref = schema['$ref']
      if ref not in self._schemas:
        raise discovery.UnsupportedDiscoveryDoc(
            'Field [{0}.{1}] refers to unknown schema [{2}].'.format(
                owner_path, json_name, ref))
      return ('_messages.MessageField', repr(ref), None,
              'A {0} attribute.'.format(ref))

    schema_type = schema.get('type')
    schema_format = schema.get('format')
    prefix = naming.CamelCase(json_name) + ('ValueListEntry' if in_list
                                            else 'Value')
    if schema_type == 'string':
      if 'enum' in schema:
        enum_name = prefix + 'ValuesEnum'
        owner.enums.append(self._MakeEnum(
            enum_name, owner_path + '.' + enum_name, schema))
        return ('_messages.EnumField', repr(enum_name), None,
                'A {0} attribute.'.format(enum_name))
      if schema_format in ('int64', 'uint64'):
        return ('_messages.IntegerField', None,
                _INTEGER_VARIANTS[schema_format], 'A integer attribute.')
      if schema_format == 'byte':
        return '_messages.BytesField', None, None, 'A byte attribute.'
      if schema_format in ('date-time', 'google-datetime'):
        self.uses_datetime = True
        return ('_message_types.DateTimeField', None, None,
                'A timestamp attribute.')
      return '_messages.StringField', None, None, 'A string attribute.'
    if schema_type == 'integer':
      return ('_messages.IntegerField', None,
              _INTEGER_VARIANTS.get(schema_format, 'INT32'),
              'A integer attribute.')
    if schema_type == 'number':
      return ('_messages.FloatField', None,
              'FLOAT' if schema_format == 'float' else 'DOUBLE',
              'A number attribute.')
    if schema_type == 'boolean':
      return '_messages.BooleanField', None, None, 'A boolean attribute.'
    if schema_type == 'object' and ('properties' in schema or
                                    'additionalProperties' in schema):
      nested = self._MakeMessage(prefix, owner_path + '.' + prefix, schema)
      owner.messages.append(nested)
      return ('_messages.MessageField', repr(prefix), None,
              'A {0} attribute.'.format(prefix))
    if schema_type in ('any', 'object', 'array'):
      # Free-form values, including lists of lists.
      self.uses_json_value = True
      return ('_messages.MessageField', 'extra_types.JsonValue', None,
              'A extra_types.JsonValue attribute.')
    raise discovery.UnsupportedDiscoveryDoc(
        'Field [{0}.{1}] has unsupported type [{2}].'.format(
            owner_path, json_name, schema_type))

  def _MakeEnum(self, name, path, schema):
    descriptions = schema.get('enumDescriptions', [])
    values = []
    names = naming.AssignUniqueNames(schema['enum'], naming.EnumValueName)
    for i, json_name in enumerate(schema['enum']):
      python_name = names[json_name]
      if python_name != json_name:
        self.uses_encoding = True
        self.enum_mappings.append((path, python_name, json_name))
      description = descriptions[i] if i < len(descriptions) else ''
      values.append((python_name, json_name, description))
    return EnumDef(name, schema.get('description') or
                   'A {0} object.'.format(name), values)


class SourcePrinter(object):
  """Accumulates indented source lines."""

  def __init__(self):
    self._lines = []
    self._indent = ''

  def __call__(self, line=''):
    self._lines.append((self._indent + line).rstrip() if line else '')

  @property
  def width(self):
    return _LINE_WIDTH - len(self._indent)

  @contextlib.contextmanager
  def Indent(self):
    previous = self._indent
    self._indent += _INDENT
    try:
      yield
    finally:
      self._indent = previous

  def Source(self):
    return '\n'.join(self._lines) + '\n'


def _CleanText(text):
  text = ' '.join((text or '').split())
  text = text.replace('"""', "'''")
  if text.endswith('"') or text.endswith('\\'):
    text += ' '
  return text


def PrintDocstring(printer, description, sections=()):
  """Prints a raw docstring with optional 'Title:' sections.

  Args:
    printer: SourcePrinter, Where to print.
    description: str, The summary text.
    sections: [(str, [(str, str)])], Section titles with their (name,
      description) entries. Entries without a name print the description
      alone.
  """
  sections = [(title, entries) for title, entries in sections if entries]
  text = _CleanText(description)
  one_line = 'r"""{0}"""'.format(text)
  if not sections and len(one_line) <= printer.width:
    printer(one_line)
    return
  for line in textwrap.wrap(text, printer.width, initial_indent='r"""',
                            break_long_words=False, break_on_hyphens=False):
    printer(line)
  for title, entries in sections:
    printer()
    printer(title + ':')
    for name, entry_description in entries:
      entry = _CleanText(entry_description)
      if name:
        entry = '{0}: {1}'.format(name, entry)
      for line in textwrap.wrap(entry, printer.width,
                                initial_indent=_INDENT,
                                subsequent_indent=_INDENT * 2,
                                break_long_words=False,
                                break_on_hyphens=False):
        printer(line)
  printer('"""')


def _PrintEnum(printer, enum):
  printer('class {0}(_messages.Enum):'.format(enum.name))
  with printer.Indent():
    PrintDocstring(printer, enum.description,
                   [('Values', [(name, description or '<no description>')
                                for name, _, description in enum.values])])
    for number, (name, _, _) in enumerate(enum.values):
      printer('{0} = {1}'.format(name, number))


def _PrintMessage(printer, message):
  if message.is_map:
    printer("@encoding.MapUnrecognizedFields('additionalProperties')")
  printer('class {0}(_messages.Message):'.format(message.name))
  with printer.Indent():
    PrintDocstring(printer, message.description, [
        ('Enums', [(e.name, e.description) for e in message.enums]),
        ('Messages', [(m.name, m.description) for m in message.messages]),
        ('Fields', [(f.name, f.description) for f in message.fields]),
    ])
    for enum in message.enums:
      printer()
      _PrintEnum(printer, enum)
    for nested in message.messages:
      printer()
      _PrintMessage(printer, nested)
    if message.fields:
      printer()
    for field in message.fields:
      printer(field.Source())


def MessagesModuleSource(doc, package, license_header=''):
  """Returns the source of the messages module for a Discovery document.

  Args:
    doc: discovery.DiscoveryDoc, The API.
    package: str, The value of the module level package attribute, used by
      protorpclite to name the message types.
    license_header: str, Comment lines put at the top of the module.

  Returns:
    str, Python source.

  Raises:
    discovery.UnsupportedDiscoveryDoc: If a schema cannot be represented.
  """
  converter = _SchemaConverter(doc)
  message_defs = converter.Convert()

  printer = SourcePrinter()
  for line in license_header.splitlines():
    printer(line)
  PrintDocstring(printer, 'Generated message classes for {0} version {1}.'
                 .format(doc.api_name, doc.api_version))
  printer('# NOTE: This file is autogenerated and should not be edited by '
          'hand.')
  printer()
  if converter.uses_datetime:
    printer('from apitools.base.protorpclite import message_types as '
            '_message_types')
  printer('from apitools.base.protorpclite import messages as _messages')
  if converter.uses_encoding:
    printer('from apitools.base.py import encoding')
  if converter.uses_json_value:
    printer('from apitools.base.py import extra_types')
  printer()
  printer()
  printer("package = '{0}'".format(package))
  for message in message_defs:
    printer()
    printer()
    _PrintMessage(printer, message)

  if converter.field_mappings or converter.enum_mappings:
    printer()
    printer()
  for path, python_name, json_name in converter.field_mappings:
    printer('encoding.AddCustomJsonFieldMapping(')
    printer('    {0}, {1!r}, {2!r})'.format(path, python_name, json_name))
  for path, python_name, json_name in converter.enum_mappings:
    printer('encoding.AddCustomJsonEnumMapping(')
    printer('    {0}, {1!r}, {2!r})'.format(path, python_name, json_name))
  return printer.Source()
