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
"""Tests for the times module."""

import datetime

from dateutil import tz

from gapis.core.util import times
from gapis.tests.lib import test_case


class FormatRfc3339Test(test_case.Base):

  def testMilliseconds(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=times.UTC)
    self.assertEqual('2024-01-02T03:04:05.123Z', times.FormatRfc3339(dt))

  def testWholeSeconds(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC)
    self.assertEqual('2024-01-02T03:04:05.000Z', times.FormatRfc3339(dt))

  def testMicroseconds(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=times.UTC)
    self.assertEqual('2024-01-02T03:04:05.123456Z', times.FormatRfc3339(dt))

  def testNaiveIsUtc(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5)
    self.assertEqual('2024-01-02T03:04:05.000Z', times.FormatRfc3339(dt))

  def testOffsetIsConvertedToUtc(self):
    dt = datetime.datetime(2024, 1, 2, 5, 4, 5,
                           tzinfo=tz.tzoffset(None, 2 * 3600))
    self.assertEqual('2024-01-02T03:04:05.000Z', times.FormatRfc3339(dt))

  def testEarlyYearsArePadded(self):
    self.assertEqual(
        '0001-01-01T00:00:00.000Z',
        times.FormatRfc3339(datetime.datetime(1, 1, 1, tzinfo=times.UTC)))
    self.assertEqual(
        '0999-05-06T07:08:09.000Z',
        times.FormatRfc3339(datetime.datetime(999, 5, 6, 7, 8, 9)))

  def testOutOfRange(self):
    dt = datetime.datetime(1, 1, 1, tzinfo=tz.tzoffset(None, 3600))
    with self.assertRaises(times.DateTimeValueError):
      times.FormatRfc3339(dt)


class ParseRfc3339Test(test_case.Base):

  def testZulu(self):
    self.assertEqual(
        datetime.datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=times.UTC),
        times.ParseRfc3339('2024-01-02T03:04:05.123Z'))

  def testNanosecondsAreTruncated(self):
    dt = times.ParseRfc3339('2014-10-02T15:01:23.045123456Z')
    self.assertEqual(45123, dt.microsecond)

  def testOffset(self):
    dt = times.ParseRfc3339('2024-01-02T05:04:05+02:00')
    self.assertEqual(
        datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC), dt)
    self.assertEqual(datetime.timedelta(0), dt.utcoffset())

  def testNoOffsetIsUtc(self):
    self.assertEqual(
        datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC),
        times.ParseRfc3339('2024-01-02T03:04:05'))

  def testInvalid(self):
    with self.assertRaises(times.DateTimeSyntaxError):
      times.ParseRfc3339('not a time')

  def testRoundTrip(self):
    for value in ('2023-12-31T23:59:59.999Z',
                  '0001-01-01T00:00:00.000Z',
                  '0999-05-06T07:08:09.000Z',
                  '9999-12-31T23:59:59.999999Z'):
      self.assertEqual(value, times.FormatRfc3339(times.ParseRfc3339(value)))


class FormatDateTimeTest(test_case.Base):

  def testFractionDigits(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, 987654, tzinfo=times.UTC)
    self.assertEqual('05.98', times.FormatDateTime(dt, '%S.%2f'))
    self.assertEqual('05.987654', times.FormatDateTime(dt, '%S.%f'))

  def testYear(self):
    dt = datetime.datetime(12, 1, 2)
    self.assertEqual('0012-01-02', times.FormatDateTime(dt, '%Y-%m-%d'))

  def testOffsetFormats(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5,
                           tzinfo=tz.tzoffset(None, -5 * 3600))
    self.assertEqual('-05:00', times.FormatDateTime(dt, '%Ez'))
    self.assertEqual('-05:00', times.FormatDateTime(dt, '%Oz'))
    utc = dt.astimezone(times.UTC)
    self.assertEqual('Z', times.FormatDateTime(utc, '%Ez'))
    self.assertEqual('+00:00', times.FormatDateTime(utc, '%Oz'))

  def testTzinfo(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC)
    self.assertEqual(
        '2024-01-02T05:04:05.000+02:00',
        times.FormatDateTime(dt, tzinfo=tz.tzoffset(None, 2 * 3600)))


class TimeStampTest(test_case.Base):

  def testRoundTrip(self):
    dt = times.GetDateTimeFromTimeStamp(1700000000.5, times.UTC)
    self.assertEqual(
        datetime.datetime(2023, 11, 14, 22, 13, 20, 500000, tzinfo=times.UTC),
        dt)
    self.assertEqual(1700000000.5, times.GetTimeStampFromDateTime(dt))

  def testLocalizeNaive(self):
    dt = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC)
    self.assertIsNone(times.LocalizeDateTime(dt, None).tzinfo)

  def testGetTimeZone(self):
    self.assertIs(times.UTC, times.GetTimeZone('Z'))
    self.assertIs(times.LOCAL, times.GetTimeZone(None))
