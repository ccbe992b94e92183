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
"""Tests for the HttpError to HttpException conversions."""

import json
import logging

from apitools.base.py import exceptions as apitools_exceptions

from gapis.api_lib.util import exceptions
from gapis.api_lib.util import http_error_handler
from gapis.core import log
from gapis.tests.lib import test_case


_WORKLOAD_URL = ('https://assuredworkloads.googleapis.com/v1/organizations/1/'
                 'locations/us/workloads/my-workload')


def MakeHttpError(status_code=404, content=None, url=_WORKLOAD_URL,
                  reason='Not Found'):
  if content is None:
    content = {
        'error': {
            'code': status_code,
            'message': 'Resource not found.',
            'status': 'NOT_FOUND',
            'details': [{'@type': 'type.googleapis.com/google.rpc.ErrorInfo',
                         'reason': 'WORKLOAD_GONE'}],
        },
        'debugInfo': 'stack',
    }
  if not isinstance(content, str):
    content = json.dumps(content)
  return apitools_exceptions.HttpError(
      {'status': str(status_code), 'reason': reason},
      content.encode('utf-8'), url)


class HttpErrorPayloadTest(test_case.Base):

  def testParsesErrorContent(self):
    payload = exceptions.HttpErrorPayload(MakeHttpError())
    self.assertEqual(404, payload.status_code)
    self.assertEqual('Not Found', payload.status_description)
    self.assertEqual('Resource not found.', payload.status_message)
    self.assertEqual('assuredworkloads', payload.api_name)
    self.assertEqual('v1', payload.api_version)
    self.assertEqual('workloads', payload.resource_name)
    self.assertEqual('workload', payload.resource_item)
    self.assertEqual('my-workload', payload.instance_name)
    self.assertEqual('Workload [my-workload] not found: Resource not found.',
                     payload.message)

  def testPermissionDenied(self):
    payload = exceptions.HttpErrorPayload(MakeHttpError(
        status_code=403, reason='Forbidden',
        content={'error': {'code': 403, 'message': 'Denied.'}}))
    self.assertEqual(
        'You do not have permission to access workload [my-workload] (or it '
        'may not exist): Denied.', payload.message)

  def testNotJson(self):
    payload = exceptions.HttpErrorPayload(MakeHttpError(
        status_code=502, reason='Bad Gateway', content='<html>oops</html>',
        url=None))
    self.assertEqual('Bad Gateway: <html>oops</html>', payload.message)

  def testNoReason(self):
    payload = exceptions.HttpErrorPayload(MakeHttpError(
        status_code=500, reason='', content='', url=None))
    self.assertEqual('HTTPError 500', payload.message)

  def testString(self):
    self.assertEqual('boom', exceptions.HttpErrorPayload('boom').message)


class HttpExceptionTest(test_case.Base):

  def testDefaultFormat(self):
    error = exceptions.HttpException(MakeHttpError())
    self.assertEqual(
        'Workload [my-workload] not found: Resource not found.\n'
        '- \'@type\': type.googleapis.com/google.rpc.ErrorInfo\n'
        '  reason: WORKLOAD_GONE',
        str(error))

  def testDebugInfoAtDebugVerbosity(self):
    log.SetVerbosity(logging.DEBUG)
    error = exceptions.HttpException(MakeHttpError(content={
        'error': {'code': 404, 'message': 'Gone.'}, 'debugInfo': 'stack'}))
    self.assertEqual('Workload [my-workload] not found: Gone.\nstack',
                     str(error))

  def testCustomFormat(self):
    error = exceptions.HttpException(
        MakeHttpError(),
        'Error {status_code}: {status_message}{url?\nurl: {?}}'
        '{.error.details.0.reason? [{?}]}{.missing?never}')
    self.assertEqual(
        'Error 404: Resource not found.\nurl: ' + _WORKLOAD_URL +
        ' [WORKLOAD_GONE]',
        error.message)

  def testEquality(self):
    self.assertEqual(exceptions.HttpException(MakeHttpError()),
                     exceptions.HttpException(MakeHttpError()))
    self.assertNotEqual(exceptions.HttpException(MakeHttpError()),
                        exceptions.HttpException(MakeHttpError(500)))

  def testDecorator(self):
    @exceptions.CatchHTTPErrorRaiseHTTPException('Failed [{status_code}]')
    def Fail():
      raise MakeHttpError()

    with self.assertRaisesRegex(exceptions.HttpException, r'^Failed \[404\]$'):
      Fail()


class HandleHttpErrorsTest(test_case.Base):

  def testGetHttpErrorMessage(self):
    self.assertEqual('NOT_FOUND: Resource not found.',
                     http_error_handler.GetHttpErrorMessage(MakeHttpError()))
    self.assertEqual(
        'HTTPError 500',
        http_error_handler.GetHttpErrorMessage(MakeHttpError(
            500, content={'error': {}})))
    self.assertEqual(
        'Denied {really}',
        http_error_handler.GetHttpErrorMessage(MakeHttpError(
            403, content={'error': {'message': 'Denied {really}'}})))

  def testFunction(self):
    @http_error_handler.HandleHttpErrors
    def Fail():
      raise MakeHttpError(403, content={
          'error': {'message': 'Denied {really}', 'status': 'DENIED'}})

    with self.assertRaises(exceptions.HttpException) as ctx:
      Fail()
    self.assertEqual('DENIED: Denied {really}', str(ctx.exception))
    self.assertIsInstance(ctx.exception.__cause__,
                          apitools_exceptions.HttpError)

  def testGenerator(self):
    @http_error_handler.HandleHttpErrors
    def Items():
      yield 1
      raise MakeHttpError()

    items = Items()
    self.assertEqual(1, next(items))
    with self.assertRaisesRegex(exceptions.HttpException, 'NOT_FOUND'):
      next(items)

  def testRejectsClasses(self):
    with self.assertRaises(TypeError):
      http_error_handler.HandleHttpErrors(dict)
