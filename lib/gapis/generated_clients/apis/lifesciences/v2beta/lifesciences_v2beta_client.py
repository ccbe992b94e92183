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
"""Generated client library for lifesciences version v2beta."""
# NOTE: This file is autogenerated and should not be edited by hand.

from gapis.api_lib.util import base_api
from gapis.generated_clients.apis.lifesciences.v2beta import lifesciences_v2beta_messages as messages


class LifesciencesV2beta(base_api.BaseApiClient):
  """Generated client library for service lifesciences version v2beta."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://lifesciences.googleapis.com/'
  MTLS_BASE_URL = 'https://lifesciences.mtls.googleapis.com/'

  _PACKAGE = 'lifesciences'
  _SCOPES = ['https://www.googleapis.com/auth/cloud-platform']
  _VERSION = 'v2beta'
  _CLIENT_CLASS_NAME = 'LifesciencesV2beta'

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Create a new lifesciences handle."""
    url = url or self.BASE_URL
    super(LifesciencesV2beta, self).__init__(
        url, credentials=credentials, get_credentials=get_credentials,
        session=session, additional_http_headers=additional_http_headers,
        default_global_params=default_global_params,
        check_response_func=check_response_func)
    self._method_configs = {
        'ProjectsLocationsGet': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.get',
            http_method='GET',
            relative_path='v2beta/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Location',
        ),
        'ProjectsLocationsList': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.list',
            http_method='GET',
            relative_path='v2beta/{+name}/locations',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListLocationsResponse',
        ),
        'ProjectsLocationsOperationsCancel': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.operations.cancel',
            http_method='POST',
            relative_path='v2beta/{+name}:cancel',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='CancelOperationRequest',
            response_type_name='Empty',
        ),
        'ProjectsLocationsOperationsGet': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.operations.get',
            http_method='GET',
            relative_path='v2beta/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Operation',
        ),
        'ProjectsLocationsOperationsList': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.operations.list',
            http_method='GET',
            relative_path='v2beta/{+name}/operations',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListOperationsResponse',
        ),
        'ProjectsLocationsPipelinesRun': base_api.ApiMethodInfo(
            method_id='lifesciences.projects.locations.pipelines.run',
            http_method='POST',
            relative_path='v2beta/{+parent}/pipelines:run',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[],
            request_type_name='RunPipelineRequest',
            response_type_name='Operation',
        ),
    }

  def ProjectsLocationsGet(self, name):
    r"""Gets information about a location.

    Args:
      name: (str) Resource name for the location.

    Returns:
      (Location) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def ProjectsLocationsList(
      self, name, filter=None, pageSize=None, pageToken=None):
    r"""Lists information about the supported locations for this service.

    Args:
      name: (str) The resource that owns the locations collection, if
        applicable.
      filter: (str) A filter to narrow down results to a preferred subset. The
        filtering language accepts strings like `"displayName=tokyo"`, and is
        documented in more detail in [AIP-160](https://google.aip.dev/160).
      pageSize: (int) The maximum number of results to return. If not set, the
        service selects a default.
      pageToken: (str) A page token received from the `next_page_token` field in
        the response. Send that page token to receive the subsequent page.

    Returns:
      (ListLocationsResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsList')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        query_params={
            'filter': filter,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsLocationsOperationsCancel(self, name, request):
    r"""Starts asynchronous cancellation on a long-running operation. The server
    makes a best effort to cancel the operation, but success is not guaranteed.
    Clients may use Operations.GetOperation or Operations.ListOperations to
    check whether the cancellation succeeded or the operation completed despite
    cancellation. Authorization requires the following [Google
    IAM](https://cloud.google.com/iam) permission: *
    `lifesciences.operations.cancel`

    Args:
      name: (str) The name of the operation resource to be cancelled.
      request: (CancelOperationRequest) The request message for
        Operations.CancelOperation.

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsOperationsCancel')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def ProjectsLocationsOperationsGet(self, name):
    r"""Gets the latest state of a long-running operation. Clients can use this
    method to poll the operation result at intervals as recommended by the API
    service. Authorization requires the following [Google
    IAM](https://cloud.google.com/iam) permission: *
    `lifesciences.operations.get`

    Args:
      name: (str) The name of the operation resource.

    Returns:
      (Operation) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsOperationsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def ProjectsLocationsOperationsList(
      self, name, filter=None, pageSize=None, pageToken=None):
    r"""Lists operations that match the specified filter in the request.
    Authorization requires the following [Google
    IAM](https://cloud.google.com/iam) permission: *
    `lifesciences.operations.list`

    Args:
      name: (str) The name of the operation's parent resource.
      filter: (str) A string for filtering Operations. The following filter
        fields are supported: * createTime: The time this job was created *
        events: The set of event (names) that have occurred while running the
        pipeline. The : operator can be used to determine if a particular event
        has occurred. * error: If the pipeline is running, this value is NULL.
        Once the pipeline finishes, the value is the standard Google error code.
        * labels.key or labels."key with space" where key is a label key. *
        done: If the pipeline is running, this value is false. Once the pipeline
        finishes, the value is true.
      pageSize: (int) The maximum number of results to return. The maximum value
        is 256.
      pageToken: (str) The standard list page token.

    Returns:
      (ListOperationsResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsOperationsList')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        query_params={
            'filter': filter,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsLocationsPipelinesRun(self, parent, request):
    r"""Runs a pipeline. The returned Operation's metadata field will contain a
    google.cloud.lifesciences.v2beta.Metadata object describing the status of
    the pipeline execution. The response field will contain a
    google.cloud.lifesciences.v2beta.RunPipelineResponse object if the pipeline
    completes successfully. **Note:** Before you can use this method, the *Life
    Sciences Service Agent* must have access to your project. This is done
    automatically when the Cloud Life Sciences API is first enabled, but if you
    delete this permission you must disable and re-enable the API to grant the
    Life Sciences Service Agent the required permissions. Authorization requires
    the following [Google IAM](https://cloud.google.com/iam/) permission: *
    `lifesciences.workflows.run`

    Args:
      parent: (str) The project and location that this request should be
        executed against.
      request: (RunPipelineRequest) The arguments to the `RunPipeline` method.
        The requesting user must have the `iam.serviceAccounts.actAs` permission
        for the Cloud Life Sciences service account or the request will fail.

    Returns:
      (Operation) The response message.
    """
    config = self.GetMethodConfig('ProjectsLocationsPipelinesRun')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        request=request,
    )


Lifesciences = LifesciencesV2beta
