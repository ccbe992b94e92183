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
"""Tests for the resource module."""

from gapis.api_lib.util import resource
from gapis.tests.lib import test_case


class SplitDefaultEndpointUrlTest(test_case.Base):

  def testServiceDomain(self):
    self.assertEqual(
        ('assuredworkloads', 'v1', 'organizations/1/locations/us'),
        resource.SplitDefaultEndpointUrl(
            'https://assuredworkloads.googleapis.com/v1/organizations/1/'
            'locations/us'))

  def testWwwDomain(self):
    self.assertEqual(
        ('storage', 'v1', 'b/bucket'),
        resource.SplitDefaultEndpointUrl(
            'https://www.googleapis.com/storage/v1/b/bucket'))

  def testOtherDomain(self):
    self.assertEqual(
        ('pears', 'v2', ''),
        resource.SplitDefaultEndpointUrl('http://localhost:8080/pears/v2/'))

  def testNoVersion(self):
    self.assertEqual(
        ('assuredworkloads', None, ''),
        resource.SplitDefaultEndpointUrl(
            'https://assuredworkloads.googleapis.com/'))

  def testInvalidUrl(self):
    with self.assertRaisesRegex(resource.InvalidEndpointException,
                                'does not start with'):
      resource.SplitDefaultEndpointUrl('ftp://example.com/pears')
