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
"""Tests for the message_printer module."""

from gapis.api_lib.regen import discovery
from gapis.api_lib.regen import message_printer
from gapis.tests.lib import test_case


class PrintDocstringTest(test_case.Base):

  def _Print(self, description, sections=(), indent=False):
    printer = message_printer.SourcePrinter()
    if indent:
      with printer.Indent():
        message_printer.PrintDocstring(printer, description, sections)
    else:
      message_printer.PrintDocstring(printer, description, sections)
    return printer.Source()

  def testOneLine(self):
    self.assertEqual('r"""A pear."""\n', self._Print('A pear.'))

  def testQuotesAreEscaped(self):
    self.assertEqual('r"""Say \'\'\'hi\'\'\' to "pears" """\n',
                     self._Print('Say """hi""" to "pears"'))

  def testSections(self):
    self.assertEqual(
        '  r"""A pear.\n'
        '\n'
        '  Fields:\n'
        '    seeds: How many seeds.\n'
        '  """\n',
        self._Print('A pear.', [('Enums', []),
                                ('Fields', [('seeds', 'How many seeds.')])],
                    indent=True))

  def testWrapping(self):
    source = self._Print(' '.join(['word'] * 30))
    lines = source.splitlines()
    self.assertEqual('r"""' + ' '.join(['word'] * 15), lines[0])
    self.assertEqual('"""', lines[-1])
    for line in lines:
      self.assertLessEqual(len(line), 80)


class MessagesModuleSourceTest(test_case.Base):

  def _Source(self, schemas):
    doc = discovery.DiscoveryDoc.FromDict(
        {'name': 'pears', 'version': 'v1', 'schemas': schemas})
    return message_printer.MessagesModuleSource(doc, 'pears')

  def testImportsFollowUsage(self):
    source = self._Source({'Pear': {'type': 'object', 'properties': {
        'name': {'type': 'string'}}}})
    self.assertIn(
        'from apitools.base.protorpclite import messages as _messages\n',
        source)
    self.assertNotIn('_message_types', source)
    self.assertNotIn('extra_types', source)
    self.assertNotIn('encoding', source)
    self.assertIn("package = 'pears'\n", source)
    self.assertIn('  name = _messages.StringField(1)\n', source)

  def testFields(self):
    source = self._Source({'Pear': {'type': 'object', 'properties': {
        'ripened': {'type': 'string', 'format': 'date-time'},
        'seeds': {'type': 'integer', 'format': 'uint32'},
        'sizes': {'type': 'array',
                  'items': {'type': 'string', 'format': 'int64'}},
        'grid': {'type': 'array', 'items': {'type': 'array',
                                            'items': {'type': 'number'}}},
        'import': {'type': 'boolean'},
    }}})
    self.assertIn('from apitools.base.protorpclite import message_types as '
                  '_message_types\n', source)
    self.assertIn('from apitools.base.py import extra_types\n', source)
    self.assertIn(
        '  grid = _messages.MessageField(extra_types.JsonValue, 1, '
        'repeated=True)\n', source)
    self.assertIn('  import_ = _messages.BooleanField(2)\n', source)
    self.assertIn('  ripened = _message_types.DateTimeField(3)\n', source)
    self.assertIn(
        '  seeds = _messages.IntegerField(4, '
        'variant=_messages.Variant.UINT32)\n', source)
    self.assertIn(
        '  sizes = _messages.IntegerField(5, '
        'variant=_messages.Variant.INT64, repeated=True)\n', source)
    self.assertIn("encoding.AddCustomJsonFieldMapping(\n"
                  "    Pear, 'import_', 'import')\n", source)
    self.assertIn("from apitools.base.py import encoding\n"
                  "from apitools.base.py import extra_types\n", source)

  def testCollidingFieldNames(self):
    source = self._Source({'Pear': {'type': 'object', 'properties': {
        'foo-bar': {'type': 'string'},
        'foo_bar': {'type': 'integer', 'format': 'int32'},
    }}})
    self.assertIn('  foo_bar_2 = _messages.StringField(1)\n', source)
    self.assertIn(
        '  foo_bar = _messages.IntegerField(2, '
        'variant=_messages.Variant.INT32)\n', source)
    self.assertIn("encoding.AddCustomJsonFieldMapping(\n"
                  "    Pear, 'foo_bar_2', 'foo-bar')\n", source)

  def testCollidingEnumValues(self):
    source = self._Source({'Pear': {'type': 'object', 'properties': {
        'kind': {'type': 'string', 'enum': ['RED-ONE', 'RED_ONE']},
    }}})
    self.assertIn("    RED_ONE_2 = 0\n    RED_ONE = 1\n", source)
    self.assertIn("encoding.AddCustomJsonEnumMapping(\n"
                  "    Pear.KindValueValuesEnum, 'RED_ONE_2', 'RED-ONE')\n",
                  source)

  def testRepeatedEnum(self):
    source = self._Source({'Pear': {'type': 'object', 'properties': {
        'colors': {'type': 'array',
                   'items': {'type': 'string', 'enum': ['GREEN', 'name']}},
    }}})
    self.assertIn('  class ColorsValueListEntryValuesEnum(_messages.Enum):\n',
                  source)
    self.assertIn('    GREEN = 0\n    name_ = 1\n', source)
    self.assertIn(
        "  colors = _messages.EnumField('ColorsValueListEntryValuesEnum', 1, "
        "repeated=True)\n", source)
    self.assertIn("encoding.AddCustomJsonEnumMapping(\n"
                  "    Pear.ColorsValueListEntryValuesEnum, 'name_', 'name')\n",
                  source)

  def testMapOfMessages(self):
    source = self._Source({
        'Orchard': {'type': 'object', 'properties': {
            'trees': {'type': 'object',
                      'additionalProperties': {'$ref': 'Tree'}}}},
        'Tree': {'type': 'object', 'properties': {}},
    })
    self.assertIn("  @encoding.MapUnrecognizedFields('additionalProperties')\n"
                  "  class TreesValue(_messages.Message):\n", source)
    self.assertIn("      value = _messages.MessageField('Tree', 2)\n", source)
    self.assertIn(
        "    additionalProperties = _messages.MessageField("
        "'AdditionalProperty', 1, repeated=True)\n", source)

  def testUnknownRef(self):
    with self.assertRaisesRegex(discovery.UnsupportedDiscoveryDoc,
                                r'Field \[Pear.tree\] refers to unknown '
                                r'schema \[Tree\]'):
      self._Source({'Pear': {'type': 'object', 'properties': {
          'tree': {'$ref': 'Tree'}}}})
