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
"""Timezone aware datetime parsing and formatting on top of dateutil.

API wire values are RFC 3339 UTC timestamps; FormatRfc3339() and
ParseRfc3339() convert them. The other helpers default to the local timezone,
pass tzinfo=None for naive datetimes.
"""

import datetime
import re

from dateutil import parser
from dateutil import tz

from gapis.core import exceptions


class Error(exceptions.Error):
  """Errors for the times module."""


class DateTimeSyntaxError(Error):
  """A date/time string cannot be parsed."""


class DateTimeValueError(Error):
  """A date/time part is out of range."""


LOCAL = tz.tzlocal()
UTC = tz.tzutc()

# %Nf, %Ez and %Oz, plus plain %f, %z and %Y.
_EXTENDED_DIRECTIVE = re.compile(r'%(?P<digits>[1-9]?)(?P<flag>[EO]?)'
                                 r'(?P<kind>[fzY])')

_RFC3339_MILLIS = '%Y-%m-%dT%H:%M:%S.%3f%Ez'
_RFC3339_MICROS = '%Y-%m-%dT%H:%M:%S.%6f%Ez'


def GetTimeZone(name):
  """Returns the tzinfo for name, None when the name is unknown.

  Args:
    name: str, A timezone name. UTC and Z are UTC; LOCAL, L and None are the
      local timezone.
  """
  if name in ('UTC', 'Z'):
    return UTC
  if name in ('LOCAL', 'L', None):
    return LOCAL
  return tz.gettz(name)


def _ExpandDirective(dt, match):
  if match.group('kind') == 'Y':
    # strftime does not pad years before 1000 on every platform.
    return '{0:04d}'.format(dt.year)
  if match.group('kind') == 'f':
    # Truncated so the seconds never change.
    return '{0:06d}'.format(dt.microsecond)[:int(match.group('digits') or 6)]
  offset = dt.strftime('%z')
  flag = match.group('flag')
  if flag == 'E' and offset in ('+0000', '-0000'):
    return 'Z'
  if flag and len(offset) == 5:
    return offset[:3] + ':' + offset[3:]
  return offset


def FormatDateTime(dt, fmt=None, tzinfo=None):
  """Formats dt with strftime(3) extended by a few directives.

    %Nf   The first N digits of the microseconds, all six without N.
    %Ez   The UTC offset as +HH:MM, or Z for UTC.
    %Oz   The UTC offset as +HH:MM.
    %Y    The year, always at least four digits.

  Args:
    dt: datetime.datetime, The value to format.
    fmt: str, The format, RFC 3339 with milliseconds by default.
    tzinfo: tzinfo, Convert dt to this timezone first.

  Raises:
    DateTimeValueError: dt cannot be formatted.

  Returns:
    str, The formatted value.
  """
  if tzinfo:
    dt = LocalizeDateTime(dt, tzinfo)
  try:
    expanded = _EXTENDED_DIRECTIVE.sub(
        lambda match: _ExpandDirective(dt, match), fmt or _RFC3339_MILLIS)
    return dt.strftime(expanded)
  except (AttributeError, OverflowError, TypeError, ValueError) as e:
    raise DateTimeValueError(str(e))


def ParseDateTime(string, fmt=None, tzinfo=LOCAL):
  """Parses a date/time string.

  Args:
    string: str, The value, in any form dateutil accepts.
    fmt: str, A strptime(3) format the value must match instead.
    tzinfo: tzinfo, The timezone of values that do not name one.

  Raises:
    DateTimeSyntaxError: The value cannot be parsed.
    DateTimeValueError: A part of the value is out of range.

  Returns:
    datetime.datetime, The parsed value.
  """
  try:
    if fmt:
      dt = datetime.datetime.strptime(string, fmt)
    else:
      dt = parser.parse(string)
  except OverflowError as e:
    raise DateTimeValueError(str(e))
  except (AttributeError, TypeError, ValueError) as e:
    raise DateTimeSyntaxError(str(e))
  if tzinfo and dt.tzinfo is None:
    dt = dt.replace(tzinfo=tzinfo)
  return dt


def FormatRfc3339(dt):
  """Formats dt as an RFC 3339 UTC wire timestamp.

  Naive values are UTC. Values on a whole millisecond keep three fraction
  digits and anything finer keeps six:

    2024-01-02T03:04:05.000Z
    2024-01-02T03:04:05.000123Z
  """
  try:
    dt = dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)
  except OverflowError as e:
    raise DateTimeValueError(str(e))
  return FormatDateTime(
      dt, _RFC3339_MICROS if dt.microsecond % 1000 else _RFC3339_MILLIS)


def ParseRfc3339(string):
  """Parses an RFC 3339 wire timestamp into an aware UTC datetime.

  Digits past the microseconds are dropped and values with no offset are UTC.

  Args:
    string: str, The timestamp, like 2014-10-02T15:01:23.045123456Z.

  Raises:
    DateTimeSyntaxError: The timestamp cannot be parsed.

  Returns:
    datetime.datetime, The timestamp in UTC.
  """
  return ParseDateTime(string, tzinfo=UTC).astimezone(UTC)


def GetDateTimeFromTimeStamp(timestamp, tzinfo=LOCAL):
  """Converts seconds since the epoch to a datetime in tzinfo."""
  try:
    return datetime.datetime.fromtimestamp(timestamp, tzinfo)
  except (OverflowError, OSError, ValueError) as e:
    raise DateTimeValueError(str(e))


def GetTimeStampFromDateTime(dt, tzinfo=LOCAL):
  """Converts dt to float seconds since the epoch, naive dt is in tzinfo."""
  if dt.tzinfo is None and tzinfo:
    dt = dt.replace(tzinfo=tzinfo)
  return (dt - datetime.datetime(1970, 1, 1, tzinfo=UTC)).total_seconds()


def LocalizeDateTime(dt, tzinfo=LOCAL):
  """Converts dt to tzinfo, or drops its timezone when tzinfo is None.

  Naive values are taken to be local time.
  """
  if tzinfo is None:
    return dt.replace(tzinfo=None)
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=LOCAL)
  return dt.astimezone(tzinfo)