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
"""JSON wire encoding for protorpclite messages.

Messages are converted by apitools' encoding module, which already writes
int64 and uint64 values as decimal strings and keeps fields and enum values a
message does not declare. Importing this module registers field codecs for
the forms Google REST APIs use where apitools differs:

* bytes are standard base64 strings, and either alphabet is accepted.
* timestamps are RFC 3339 strings in UTC, e.g. "2024-01-02T03:04:05.123Z".
* NaN and infinite numbers are the strings "NaN", "Infinity" and
  "-Infinity".

The codecs are registered per field type, so they apply to every
protorpclite message converted by apitools in the process.
"""

import base64
import binascii
import json
import math

from apitools.base.protorpclite import message_types
from apitools.base.protorpclite import messages
from apitools.base.py import encoding as apitools_encoding
from apitools.base.py import exceptions as apitools_exceptions

from gapis.core import exceptions
from gapis.core.util import times


class Error(exceptions.Error):
  """Errors for this module."""


class EncodeError(Error):
  """A message could not be written as JSON."""


class DecodeError(Error):
  """A JSON value could not be read into a message."""


# Errors apitools and protorpclite raise for values that do not fit a message.
_CONVERSION_ERRORS = (apitools_exceptions.Error, messages.Error, TypeError,
                      ValueError)

_NON_FINITE_FLOATS = {
    'NaN': float('nan'),
    'Infinity': float('inf'),
    '-Infinity': float('-inf'),
}

MapUnrecognizedFields = apitools_encoding.MapUnrecognizedFields
AddCustomJsonFieldMapping = apitools_encoding.AddCustomJsonFieldMapping
AddCustomJsonEnumMapping = apitools_encoding.AddCustomJsonEnumMapping
GetCustomJsonFieldMapping = apitools_encoding.GetCustomJsonFieldMapping
GetCustomJsonEnumMapping = apitools_encoding.GetCustomJsonEnumMapping
DictToAdditionalPropertyMessage = (
    apitools_encoding.DictToAdditionalPropertyMessage)


def EncodeInt64(value):
  """Returns the JSON string form of a 64 bit integer."""
  return str(int(value))


def DecodeInt64(value):
  """Parses a 64 bit integer sent as a string or a number."""
  if isinstance(value, bool):
    raise DecodeError('Expected an integer, got [{0}]'.format(value))
  try:
    return int(value)
  except (TypeError, ValueError):
    raise DecodeError('Invalid integer value [{0}]'.format(value))


def EncodeBytes(value):
  """Returns the standard base64 form of value."""
  return base64.b64encode(value).decode('ascii')


def DecodeBytes(value):
  """Decodes standard or URL safe base64, with or without padding."""
  if not isinstance(value, str):
    raise DecodeError('Expected a base64 string, got [{0}]'.format(value))
  value = value.replace('-', '+').replace('_', '/')
  value += '=' * (-len(value) % 4)
  try:
    return base64.b64decode(value.encode('ascii'), validate=True)
  except (binascii.Error, UnicodeEncodeError):
    raise DecodeError('Invalid base64 value [{0}]'.format(value))


def EncodeDateTime(value):
  """Returns the RFC 3339 UTC form of a datetime."""
  try:
    return times.FormatRfc3339(value)
  except times.Error as e:
    raise EncodeError('Invalid timestamp [{0}]: {1}'.format(value, e))


def DecodeDateTime(value):
  """Parses an RFC 3339 timestamp into an aware UTC datetime."""
  if not isinstance(value, str):
    raise DecodeError('Expected a timestamp string, got [{0}]'.format(value))
  try:
    return times.ParseRfc3339(value)
  except times.Error as e:
    raise DecodeError('Invalid timestamp [{0}]: {1}'.format(value, e))


def EncodeFloat(value):
  """Returns value, or its string name when it is NaN or infinite."""
  if math.isnan(value):
    return 'NaN'
  if math.isinf(value):
    return 'Infinity' if value > 0 else '-Infinity'
  return value


def _EncodeEach(field, value, encoder):
  if field.repeated:
    value = [encoder(v) for v in value]
  else:
    value = encoder(value)
  return apitools_encoding.CodecResult(value=value, complete=True)


def _Decode(value, decoder):
  # protojson turns messages.DecodeError into a failed decode of the message.
  try:
    value = decoder(value)
  except DecodeError as e:
    raise messages.DecodeError(str(e))
  return apitools_encoding.CodecResult(value=value, complete=True)


def _EncodeDateTimeField(field, value):
  return _EncodeEach(field, value, EncodeDateTime)


def _DecodeDateTimeField(unused_field, value):
  return _Decode(value, DecodeDateTime)


def _EncodeBytesField(field, value):
  return _EncodeEach(field, value, EncodeBytes)


def _DecodeBytesField(unused_field, value):
  return _Decode(value, DecodeBytes)


def _EncodeFloatField(field, value):
  return _EncodeEach(field, value, EncodeFloat)


def _DecodeFloatField(unused_field, value):
  if isinstance(value, str) and value in _NON_FINITE_FLOATS:
    return apitools_encoding.CodecResult(
        value=_NON_FINITE_FLOATS[value], complete=True)
  # Numbers and numeric strings are left to protojson.
  return apitools_encoding.CodecResult(value=value, complete=False)


apitools_encoding.RegisterFieldTypeCodec(
    _EncodeDateTimeField, _DecodeDateTimeField)(message_types.DateTimeField)
apitools_encoding.RegisterFieldTypeCodec(
    _EncodeBytesField, _DecodeBytesField)(messages.BytesField)
apitools_encoding.RegisterFieldTypeCodec(
    _EncodeFloatField, _DecodeFloatField)(messages.FloatField)


def MessageToJson(message, indent=None):
  """Serializes a message to a JSON string.

  Args:
    message: messages.Message, The message to serialize.
    indent: int, Pretty print with this indent, compact when None.

  Returns:
    str, The JSON object, with sorted keys.

  Raises:
    EncodeError: If message is not a message, or holds a value JSON cannot
      represent.
  """
  if not isinstance(message, messages.Message):
    raise EncodeError('Expected a message, got [{0}]'.format(message))
  try:
    value = json.loads(apitools_encoding.MessageToJson(message))
    # NaN can still hide in free-form JsonValue fields.
    return json.dumps(value, indent=indent, sort_keys=True, allow_nan=False)
  except _CONVERSION_ERRORS as e:
    raise EncodeError('Cannot encode [{0}]: {1}'.format(
        type(message).__name__, e))


def JsonToMessage(message_type, content):
  """Parses a JSON string into a message_type instance.

  Args:
    message_type: type, The messages.Message subclass to build.
    content: str or bytes, The JSON text. Empty content gives an empty message.

  Returns:
    A message_type instance.

  Raises:
    DecodeError: If content is not valid JSON for message_type.
  """
  if isinstance(content, bytes):
    content = content.decode('utf-8')
  if not content or not content.strip():
    return message_type()
  try:
    value = json.loads(content)
  except ValueError as e:
    raise DecodeError('Invalid JSON for [{0}]: {1}'.format(
        message_type.__name__, e))
  if not isinstance(value, dict):
    raise DecodeError('Expected a JSON object for [{0}], got [{1}]'.format(
        message_type.__name__, value))
  try:
    return apitools_encoding.JsonToMessage(message_type, content)
  except _CONVERSION_ERRORS as e:
    raise DecodeError('Invalid value for [{0}]: {1}'.format(
        message_type.__name__, e))


def MessageToPyValue(message):
  """Converts a message into plain Python values in their JSON wire form."""
  return json.loads(MessageToJson(message))


def PyValueToMessage(message_type, value):
  """Builds a message from plain Python values in their JSON wire form.

  Keys the message does not declare, and enum names it does not know, are
  kept as unrecognized fields of the message.

  Args:
    message_type: type, The messages.Message subclass to build.
    value: dict, The JSON object.

  Returns:
    A message_type instance.

  Raises:
    DecodeError: If value does not have the shape of message_type.
  """
  if not isinstance(value, dict):
    raise DecodeError('Expected a JSON object for [{0}], got [{1}]'.format(
        message_type.__name__, value))
  try:
    content = json.dumps(value)
  except (TypeError, ValueError) as e:
    raise DecodeError('Cannot read [{0}] as JSON: {1}'.format(value, e))
  return JsonToMessage(message_type, content)


def MessageToDict(message):
  return MessageToPyValue(message)


def DictToMessage(d, message_type):
  """Converts a dict into a message_type instance, in apitools' order."""
  return PyValueToMessage(message_type, d)


def AdditionalPropertiesToDict(message):
  """Returns the entries of a map message as a {key: value} dict."""
  return dict((entry.key, entry.value)
              for entry in message.additionalProperties)
