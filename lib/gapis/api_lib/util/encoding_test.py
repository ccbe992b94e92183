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
"""Tests for the JSON wire encoding of messages."""

import datetime
import math

from apitools.base.protorpclite import message_types as _message_types
from apitools.base.protorpclite import messages as _messages
from apitools.base.py import exceptions as apitools_exceptions
from apitools.base.py import extra_types
from dateutil import tz

from gapis.api_lib.util import encoding
from gapis.core.util import times
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages as messages
from gapis.tests.lib import test_case


class Blob(_messages.Message):
  """A message using the names and types Assured Workloads does not."""

  class ColorValueValuesEnum(_messages.Enum):
    COLOR_UNSPECIFIED = 0
    RED = 1
    _1 = 2

  class_ = _messages.StringField(1)
  color = _messages.EnumField('ColorValueValuesEnum', 2)
  data = _messages.BytesField(3)
  ratio = _messages.FloatField(4)
  sizes = _messages.IntegerField(5, repeated=True)
  values = _messages.MessageField(extra_types.JsonValue, 6, repeated=True)


encoding.AddCustomJsonFieldMapping(Blob, 'class_', 'class')
encoding.AddCustomJsonEnumMapping(Blob.ColorValueValuesEnum, '_1', '1')


class Sample(_messages.Message):
  """One field of each type with a special wire form."""

  count = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  data = _messages.BytesField(2)
  ratios = _messages.FloatField(3, repeated=True)
  size = _messages.IntegerField(4, variant=_messages.Variant.UINT64)
  time = _message_types.DateTimeField(5)


class EncodeTest(test_case.Base):

  def testInt64IsAString(self):
    info = messages.GoogleCloudAssuredworkloadsV1WorkloadResourceInfo(
        resourceId=123456789012345678)
    self.assertEqual({'resourceId': '123456789012345678'},
                     encoding.MessageToPyValue(info))

  def testInt32IsANumber(self):
    status = messages.GoogleCloudAssuredworkloadsV1WorkloadComplianceStatus(
        activeViolationCount=3)
    self.assertEqual({'activeViolationCount': 3},
                     encoding.MessageToPyValue(status))

  def testRepeatedInt64(self):
    self.assertEqual({'sizes': ['1', '2']},
                     encoding.MessageToPyValue(Blob(sizes=[1, 2])))

  def testDateTime(self):
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        createTime=datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=times.UTC))
    self.assertEqual({'createTime': '2024-01-02T03:04:05.000Z'},
                     encoding.MessageToPyValue(workload))

  def testBytesAreStandardBase64(self):
    self.assertEqual({'data': 'AP8Q'},
                     encoding.MessageToPyValue(Blob(data=b'\x00\xff\x10')))
    self.assertEqual({'data': '+/8='},
                     encoding.MessageToPyValue(Blob(data=b'\xfb\xff')))

  def testNonFiniteFloatsAreStrings(self):
    self.assertEqual(
        '{"ratios": ["NaN", "Infinity", "-Infinity", 1.5]}',
        encoding.MessageToJson(Sample(ratios=[
            float('nan'), float('inf'), float('-inf'), 1.5])))
    self.assertEqual('{"ratio": "NaN"}',
                     encoding.MessageToJson(Blob(ratio=float('nan'))))

  def testNaNInFreeFormValue(self):
    blob = Blob(values=[extra_types.JsonValue(double_value=float('nan'))])
    with self.assertRaises(encoding.EncodeError):
      encoding.MessageToJson(blob)

  def testEnum(self):
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        complianceRegime=(messages.GoogleCloudAssuredworkloadsV1Workload
                          .ComplianceRegimeValueValuesEnum.IL4))
    self.assertEqual({'complianceRegime': 'IL4'},
                     encoding.MessageToPyValue(workload))

  def testCustomNames(self):
    blob = Blob(class_='wicker', color=Blob.ColorValueValuesEnum._1)
    self.assertEqual({'class': 'wicker', 'color': '1'},
                     encoding.MessageToPyValue(blob))

  def testUnsetAndEmptyRepeatedAreOmitted(self):
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        displayName='w', resources=[])
    self.assertEqual({'displayName': 'w'},
                     encoding.MessageToPyValue(workload))

  def testNestedAndRepeatedMessages(self):
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        resources=[
            messages.GoogleCloudAssuredworkloadsV1WorkloadResourceInfo(
                resourceId=1),
            messages.GoogleCloudAssuredworkloadsV1WorkloadResourceInfo(
                resourceId=2),
        ],
        kmsSettings=messages.GoogleCloudAssuredworkloadsV1WorkloadKMSSettings(
            rotationPeriod='3600s'))
    self.assertEqual(
        {'resources': [{'resourceId': '1'}, {'resourceId': '2'}],
         'kmsSettings': {'rotationPeriod': '3600s'}},
        encoding.MessageToPyValue(workload))

  def testMap(self):
    labels_type = messages.GoogleCloudAssuredworkloadsV1Workload.LabelsValue
    workload = messages.GoogleCloudAssuredworkloadsV1Workload(
        labels=encoding.DictToAdditionalPropertyMessage(
            {'env': 'prod', 'team': 'a'}, labels_type, sort_items=True))
    self.assertEqual({'labels': {'env': 'prod', 'team': 'a'}},
                     encoding.MessageToPyValue(workload))

  def testMessageToJson(self):
    status = messages.GoogleCloudAssuredworkloadsV1WorkloadComplianceStatus(
        activeViolationCount=3, acknowledgedViolationCount=1)
    self.assertEqual(
        '{"acknowledgedViolationCount": 1, "activeViolationCount": 3}',
        encoding.MessageToJson(status))
    self.assertEqual(
        '{\n  "acknowledgedViolationCount": 1,\n'
        '  "activeViolationCount": 3\n}',
        encoding.MessageToJson(status, indent=2))

  def testNotAMessage(self):
    with self.assertRaises(encoding.EncodeError):
      encoding.MessageToPyValue({'a': 1})


class DecodeTest(test_case.Base):

  def testInt64FromStringOrNumber(self):
    info_type = messages.GoogleCloudAssuredworkloadsV1WorkloadResourceInfo
    self.assertEqual(
        123456789012345678,
        encoding.PyValueToMessage(
            info_type, {'resourceId': '123456789012345678'}).resourceId)
    self.assertEqual(
        5, encoding.PyValueToMessage(info_type, {'resourceId': 5}).resourceId)

  def testDateTime(self):
    workload = encoding.PyValueToMessage(
        messages.GoogleCloudAssuredworkloadsV1Workload,
        {'createTime': '2024-01-02T03:04:05.123456789Z'})
    self.assertEqual(
        datetime.datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=times.UTC),
        workload.createTime)

  def testBytesStandardAndUrlSafe(self):
    self.assertEqual(b'\x00\xff\x10',
                     encoding.PyValueToMessage(Blob, {'data': 'AP8Q'}).data)
    self.assertEqual(b'\xfb\xff',
                     encoding.PyValueToMessage(Blob, {'data': '-_8'}).data)
    self.assertEqual(b'\xfb\xff',
                     encoding.PyValueToMessage(Blob, {'data': '+/8='}).data)

  def testNonFiniteFloats(self):
    sample = encoding.PyValueToMessage(
        Sample, {'ratios': ['NaN', 'Infinity', '-Infinity', 2, '0.5']})
    self.assertTrue(math.isnan(sample.ratios[0]))
    self.assertEqual([float('inf'), float('-inf'), 2.0, 0.5],
                     sample.ratios[1:])

  def testEnums(self):
    violation = encoding.PyValueToMessage(
        messages.GoogleCloudAssuredworkloadsV1Violation,
        {'state': 'RESOLVED'})
    self.assertEqual(
        messages.GoogleCloudAssuredworkloadsV1Violation
        .StateValueValuesEnum.RESOLVED,
        violation.state)
    self.assertEqual(
        Blob.ColorValueValuesEnum._1,
        encoding.PyValueToMessage(Blob, {'color': '1'}).color)

  def testUnknownEnumIsKept(self):
    violation = encoding.PyValueToMessage(
        messages.GoogleCloudAssuredworkloadsV1Violation,
        {'state': 'SNOOZED', 'name': 'v'})
    self.assertIsNone(violation.state)
    self.assertEqual({'state': 'SNOOZED', 'name': 'v'},
                     encoding.MessageToPyValue(violation))

  def testUnknownFieldsRoundTrip(self):
    value = {
        'name': 'organizations/1/locations/us/workloads/w',
        'futureField': {'a': [1, 'b']},
        'futureFlag': True,
    }
    workload = encoding.PyValueToMessage(
        messages.GoogleCloudAssuredworkloadsV1Workload, value)
    self.assertEqual(value['name'], workload.name)
    self.assertEqual(value, encoding.MessageToPyValue(workload))

  def testJsonValueMap(self):
    value = {
        'metadata': {
            '@type': 'type.googleapis.com/google.cloud.assuredworkloads.v1.'
                     'CreateWorkloadOperationMetadata',
            'count': 2,
            'ratio': 0.5,
            'nested': {'x': [1, None, 'y'], 'ok': False},
        },
        'done': True,
    }
    operation = encoding.PyValueToMessage(
        messages.GoogleLongrunningOperation, value)
    self.assertTrue(operation.done)
    self.assertEqual(value['metadata'],
                     encoding.MessageToPyValue(operation.metadata))
    self.assertEqual(
        2, encoding.AdditionalPropertiesToDict(
            operation.metadata)['count'].integer_value)
    self.assertEqual(value, encoding.MessageToPyValue(operation))

  def testRepeatedMapEntries(self):
    status = encoding.PyValueToMessage(
        messages.GoogleRpcStatus,
        {'code': 5, 'message': 'not found',
         'details': [{'@type': 'type.googleapis.com/google.rpc.ErrorInfo',
                      'reason': 'GONE'}]})
    self.assertEqual(5, status.code)
    self.assertEqual(1, len(status.details))
    self.assertEqual(
        {'@type': 'type.googleapis.com/google.rpc.ErrorInfo',
         'reason': 'GONE'},
        encoding.MessageToPyValue(status.details[0]))

  def testRepeatedJsonValues(self):
    blob = encoding.PyValueToMessage(Blob, {'values': [1, 'a', None]})
    self.assertEqual(3, len(blob.values))
    self.assertTrue(blob.values[2].is_null)
    self.assertEqual({'values': [1, 'a', None]},
                     encoding.MessageToPyValue(blob))

  def testCustomFieldName(self):
    self.assertEqual(
        'wicker', encoding.PyValueToMessage(Blob, {'class': 'wicker'}).class_)

  def testNullIsUnset(self):
    workload = encoding.PyValueToMessage(
        messages.GoogleCloudAssuredworkloadsV1Workload,
        {'displayName': None})
    self.assertIsNone(workload.displayName)
    self.assertEqual({}, encoding.MessageToPyValue(workload))

  def testIntegerAsFloat(self):
    self.assertEqual(2.0, encoding.PyValueToMessage(Blob, {'ratio': 2}).ratio)

  def testBadValues(self):
    workload_type = messages.GoogleCloudAssuredworkloadsV1Workload
    for value in ({'displayName': 3},
                  {'enableSovereignControls': 'maybe'},
                  {'createTime': 'yesterday'},
                  {'createTime': 12}):
      with self.assertRaises(encoding.DecodeError):
        encoding.PyValueToMessage(workload_type, value)
    with self.assertRaises(encoding.DecodeError):
      encoding.PyValueToMessage(Blob, {'data': 'not base64!'})
    with self.assertRaises(encoding.DecodeError):
      encoding.PyValueToMessage(Blob, {'sizes': ['x']})
    with self.assertRaises(encoding.DecodeError):
      encoding.PyValueToMessage(workload_type, [])

  def testJsonToMessage(self):
    status_type = messages.GoogleCloudAssuredworkloadsV1WorkloadComplianceStatus
    self.assertEqual(
        status_type(activeViolationCount=4),
        encoding.JsonToMessage(status_type, b'{"activeViolationCount": 4}'))
    self.assertEqual(status_type(), encoding.JsonToMessage(status_type, b''))
    with self.assertRaises(encoding.DecodeError):
      encoding.JsonToMessage(status_type, '{not json')
    with self.assertRaises(encoding.DecodeError):
      encoding.JsonToMessage(status_type, '[1]')

  def testDictToMessage(self):
    status_type = messages.GoogleCloudAssuredworkloadsV1WorkloadComplianceStatus
    status = encoding.DictToMessage({'activeViolationCount': 4}, status_type)
    self.assertEqual(status_type(activeViolationCount=4), status)
    self.assertEqual({'activeViolationCount': 4},
                     encoding.MessageToDict(status))


class RoundTripTest(test_case.Base):
  """Values at the edges of each wire form survive encode then decode."""

  def _RoundTrip(self, message):
    return encoding.JsonToMessage(Sample, encoding.MessageToJson(message))

  def testEdgeValues(self):
    cases = [
        ('count', -2**63, '-9223372036854775808'),
        ('count', 2**63 - 1, '9223372036854775807'),
        ('count', 0, '0'),
        ('size', 2**64 - 1, '18446744073709551615'),
        ('data', b'', ''),
        ('data', b'\xff\xfe\x00\xe2\x82\xac', '//4A4oKs'),
        ('time', datetime.datetime(1, 1, 1, tzinfo=times.UTC),
         '0001-01-01T00:00:00.000Z'),
        ('time', datetime.datetime(9999, 12, 31, 23, 59, 59, 999999,
                                   tzinfo=times.UTC),
         '9999-12-31T23:59:59.999999Z'),
        ('time', datetime.datetime(2024, 1, 2, 5, 4, 5,
                                   tzinfo=tz.tzoffset(None, 2 * 3600)),
         '2024-01-02T03:04:05.000Z'),
    ]
    for name, value, wire in cases:
      message = Sample(**{name: value})
      self.assertEqual({name: wire}, encoding.MessageToPyValue(message))
      self.assertEqual(value, getattr(self._RoundTrip(message), name))

  def testNanosecondsAreTruncated(self):
    sample = encoding.PyValueToMessage(
        Sample, {'time': '2024-01-02T03:04:05.123456789+01:00'})
    self.assertEqual(
        datetime.datetime(2024, 1, 2, 2, 4, 5, 123456, tzinfo=times.UTC),
        sample.time)
    self.assertEqual({'time': '2024-01-02T02:04:05.123456Z'},
                     encoding.MessageToPyValue(sample))

  def testFloats(self):
    values = [float('inf'), float('-inf'), 0.1, -0.0, 1e308]
    self.assertEqual(values,
                     self._RoundTrip(Sample(ratios=values)).ratios)
    self.assertTrue(math.isnan(
        self._RoundTrip(Sample(ratios=[float('nan')])).ratios[0]))


class CustomMappingTest(test_case.Base):

  def testLookups(self):
    self.assertEqual('class', encoding.GetCustomJsonFieldMapping(
        Blob, python_name='class_'))
    self.assertEqual('class_', encoding.GetCustomJsonFieldMapping(
        Blob, json_name='class'))
    self.assertIsNone(encoding.GetCustomJsonFieldMapping(
        Blob, python_name='data'))
    self.assertEqual('1', encoding.GetCustomJsonEnumMapping(
        Blob.ColorValueValuesEnum, python_name='_1'))

  def testLookupNeedsExactlyOneName(self):
    with self.assertRaises(apitools_exceptions.InvalidDataError):
      encoding.GetCustomJsonFieldMapping(Blob)

  def testInvalidMappings(self):
    with self.assertRaises(apitools_exceptions.InvalidDataError):
      encoding.AddCustomJsonFieldMapping(Blob, 'nope', 'nope')
    with self.assertRaises(apitools_exceptions.TypecheckError):
      encoding.AddCustomJsonFieldMapping(dict, 'a', 'b')
    with self.assertRaises(apitools_exceptions.InvalidDataError):
      encoding.AddCustomJsonEnumMapping(Blob.ColorValueValuesEnum, 'NOPE', 'x')


class HelperTest(test_case.Base):

  def testInt64(self):
    self.assertEqual('-9223372036854775808', encoding.EncodeInt64(-2**63))
    self.assertEqual(2**64 - 1, encoding.DecodeInt64('18446744073709551615'))
    self.assertEqual(7, encoding.DecodeInt64(7))
    for value in (True, 'seven', None):
      with self.assertRaises(encoding.DecodeError):
        encoding.DecodeInt64(value)

  def testBytes(self):
    self.assertEqual('', encoding.EncodeBytes(b''))
    self.assertEqual(b'\xfb\xff', encoding.DecodeBytes('-_8'))
    with self.assertRaises(encoding.DecodeError):
      encoding.DecodeBytes(b'AP8Q')

  def testDateTime(self):
    with self.assertRaises(encoding.EncodeError):
      encoding.EncodeDateTime(
          datetime.datetime(1, 1, 1, tzinfo=tz.tzoffset(None, 3600)))
    with self.assertRaises(encoding.DecodeError):
      encoding.DecodeDateTime(None)
