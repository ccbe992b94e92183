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
"""Tests for the naming module."""

from gapis.api_lib.regen import discovery
from gapis.api_lib.regen import naming
from gapis.tests.lib import test_case


class PythonIdentifierTest(test_case.Base):

  def testUnchanged(self):
    self.assertEqual('pageToken', naming.PythonIdentifier('pageToken'))

  def testInvalidCharacters(self):
    self.assertEqual('interval_endTime',
                     naming.PythonIdentifier('interval.endTime'))
    self.assertEqual('__xgafv', naming.PythonIdentifier('$.xgafv'))
    self.assertEqual('v4_1', naming.PythonIdentifier('v4.1'))

  def testLeadingDigit(self):
    self.assertEqual('_1', naming.PythonIdentifier('1'))
    self.assertEqual('_2fa', naming.PythonIdentifier('2fa'))

  def testKeywordsAndReserved(self):
    self.assertEqual('class_', naming.PythonIdentifier('class'))
    self.assertEqual('from_', naming.ParamName('from'))
    self.assertEqual('request_', naming.ParamName('request'))
    self.assertEqual('self_', naming.ParamName('self'))
    self.assertEqual('reset_', naming.FieldName('reset'))
    self.assertEqual('request', naming.FieldName('request'))
    self.assertEqual('name_', naming.EnumValueName('name'))
    self.assertEqual('NAME', naming.EnumValueName('NAME'))


class CamelCaseTest(test_case.Base):

  def testCamelCase(self):
    self.assertEqual('MutatePartnerPermissions',
                     naming.CamelCase('mutatePartnerPermissions'))
    self.assertEqual('IntervalEndTime', naming.CamelCase('interval.endTime'))
    self.assertEqual('ServiceAccounts', naming.CamelCase('service_accounts'))
    self.assertEqual('', naming.CamelCase(''))

  def testClientClassName(self):
    self.assertEqual('AssuredworkloadsV1',
                     naming.ClientClassName('assuredworkloads', 'v1'))
    self.assertEqual('PearV7Test', naming.ClientClassName('pear', 'v7_test'))

  def testMethodName(self):
    self.assertEqual(
        'OrganizationsLocationsWorkloadsViolationsList',
        naming.MethodName(
            ['organizations', 'locations', 'workloads', 'violations'], 'list'))
    self.assertEqual('Import', naming.MethodName([], 'import'))


class PrimaryNameTest(test_case.Base):

  def testTitleSpellsName(self):
    self.assertEqual(
        'AssuredWorkloads',
        naming.PrimaryName('assuredworkloads',
                           'Assured Workloads API'.split()))
    self.assertEqual(
        'CloudResourceManager',
        naming.PrimaryName('cloudresourcemanager',
                           'Cloud Resource Manager API'.split()))

  def testTitleCase(self):
    self.assertEqual('BigQuery',
                     naming.PrimaryName('bigquery', ['BigQuery', 'API']))

  def testTitleDoesNotSpellName(self):
    self.assertEqual('Fruits',
                     naming.PrimaryName('fruits', 'Fruit Basket API'.split()))
    self.assertEqual('Iam', naming.PrimaryName('iam', []))


class CheckMethodNamesTest(test_case.Base):

  def _Method(self, resource_path, name):
    return discovery.Method(resource_path, name, {
        'id': '.'.join(['fruits'] + resource_path + [name])})

  def testNoConflict(self):
    naming.CheckMethodNames([self._Method(['projects'], 'get'),
                             self._Method(['projects', 'baskets'], 'get')])

  def testConflict(self):
    with self.assertRaisesRegex(
        naming.ConflictingMethodName,
        r'Methods \[fruits.projectsBaskets.get\] and '
        r'\[fruits.projects.baskets.get\] both map to '
        r'\[ProjectsBasketsGet\].'):
      naming.CheckMethodNames([self._Method(['projectsBaskets'], 'get'),
                               self._Method(['projects', 'baskets'], 'get')])


class AssignUniqueNamesTest(test_case.Base):

  def testCleanNamesWin(self):
    self.assertEqual(
        {'foo-bar': 'foo_bar_2', 'foo_bar': 'foo_bar'},
        naming.AssignUniqueNames(['foo-bar', 'foo_bar'], naming.FieldName))

  def testSuffixesCount(self):
    self.assertEqual(
        {'a.b': 'a_b', 'a-b': 'a_b_2', 'a b': 'a_b_3'},
        naming.AssignUniqueNames(['a.b', 'a-b', 'a b'], naming.FieldName))

  def testSuffixSkipsTakenNames(self):
    self.assertEqual(
        {'x-y': 'x_y_3', 'x_y': 'x_y', 'x_y_2': 'x_y_2'},
        naming.AssignUniqueNames(['x-y', 'x_y', 'x_y_2'], naming.FieldName))

  def testReservedNames(self):
    self.assertEqual(
        {'reset': 'reset__2', 'reset_': 'reset_'},
        naming.AssignUniqueNames(['reset', 'reset_'], naming.FieldName))
