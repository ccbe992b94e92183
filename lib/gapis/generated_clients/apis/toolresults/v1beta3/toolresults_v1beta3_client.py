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
"""Generated client library for toolresults version v1beta3."""
# NOTE: This file is autogenerated and should not be edited by hand.

from gapis.api_lib.util import base_api
from gapis.generated_clients.apis.toolresults.v1beta3 import toolresults_v1beta3_messages as messages


class ToolresultsV1beta3(base_api.BaseApiClient):
  """Generated client library for service toolresults version v1beta3."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://toolresults.googleapis.com/'
  MTLS_BASE_URL = 'https://toolresults.mtls.googleapis.com/'

  _PACKAGE = 'toolresults'
  _SCOPES = ['https://www.googleapis.com/auth/cloud-platform']
  _VERSION = 'v1beta3'
  _CLIENT_CLASS_NAME = 'ToolresultsV1beta3'

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Create a new toolresults handle."""
    url = url or self.BASE_URL
    super(ToolresultsV1beta3, self).__init__(
        url, credentials=credentials, get_credentials=get_credentials,
        session=session, additional_http_headers=additional_http_headers,
        default_global_params=default_global_params,
        check_response_func=check_response_func)
    self._method_configs = {
        'ProjectsGetSettings': base_api.ApiMethodInfo(
            method_id='toolresults.projects.getSettings',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/settings',
            ordered_params=['projectId'],
            path_params=['projectId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ProjectSettings',
        ),
        'ProjectsInitializeSettings': base_api.ApiMethodInfo(
            method_id='toolresults.projects.initializeSettings',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}:initializeSettings',
            ordered_params=['projectId'],
            path_params=['projectId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ProjectSettings',
        ),
        'ProjectsHistoriesCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.create',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories',
            ordered_params=['projectId'],
            path_params=['projectId'],
            query_params=['requestId'],
            request_type_name='History',
            response_type_name='History',
        ),
        'ProjectsHistoriesGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}',
            ordered_params=['projectId', 'historyId'],
            path_params=['projectId', 'historyId'],
            query_params=[],
            request_type_name=None,
            response_type_name='History',
        ),
        'ProjectsHistoriesList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories',
            ordered_params=['projectId'],
            path_params=['projectId'],
            query_params=['filterByName', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListHistoriesResponse',
        ),
        'ProjectsHistoriesExecutionsCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.create',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions',
            ordered_params=['projectId', 'historyId'],
            path_params=['projectId', 'historyId'],
            query_params=['requestId'],
            request_type_name='Execution',
            response_type_name='Execution',
        ),
        'ProjectsHistoriesExecutionsGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Execution',
        ),
        'ProjectsHistoriesExecutionsList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions',
            ordered_params=['projectId', 'historyId'],
            path_params=['projectId', 'historyId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListExecutionsResponse',
        ),
        'ProjectsHistoriesExecutionsPatch': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.patch',
            http_method='PATCH',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=['requestId'],
            request_type_name='Execution',
            response_type_name='Execution',
        ),
        'ProjectsHistoriesExecutionsClustersGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.clusters.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/clusters/{clusterId}',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'clusterId',
            ],
            path_params=['projectId', 'historyId', 'executionId', 'clusterId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ScreenshotCluster',
        ),
        'ProjectsHistoriesExecutionsClustersList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.clusters.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/clusters',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ListScreenshotClustersResponse',
        ),
        'ProjectsHistoriesExecutionsEnvironmentsGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.environments.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/environments/{environmentId}',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'environmentId',
            ],
            path_params=[
                'projectId',
                'historyId',
                'executionId',
                'environmentId',
            ],
            query_params=[],
            request_type_name=None,
            response_type_name='Environment',
        ),
        'ProjectsHistoriesExecutionsEnvironmentsList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.environments.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/environments',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListEnvironmentsResponse',
        ),
        'ProjectsHistoriesExecutionsStepsAccessibilityClusters': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.accessibilityClusters',
            http_method='GET',
            relative_path='toolresults/v1beta3/{+name}:accessibilityClusters',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['locale'],
            request_type_name=None,
            response_type_name='ListStepAccessibilityClustersResponse',
        ),
        'ProjectsHistoriesExecutionsStepsCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.create',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=['requestId'],
            request_type_name='Step',
            response_type_name='Step',
        ),
        'ProjectsHistoriesExecutionsStepsGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Step',
        ),
        'ProjectsHistoriesExecutionsStepsGetPerfMetricsSummary': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.getPerfMetricsSummary',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfMetricsSummary',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=[],
            request_type_name=None,
            response_type_name='PerfMetricsSummary',
        ),
        'ProjectsHistoriesExecutionsStepsList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps',
            ordered_params=['projectId', 'historyId', 'executionId'],
            path_params=['projectId', 'historyId', 'executionId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListStepsResponse',
        ),
        'ProjectsHistoriesExecutionsStepsPatch': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.patch',
            http_method='PATCH',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=['requestId'],
            request_type_name='Step',
            response_type_name='Step',
        ),
        'ProjectsHistoriesExecutionsStepsPublishXunitXmlFiles': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.publishXunitXmlFiles',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}:publishXunitXmlFiles',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=[],
            request_type_name='PublishXunitXmlFilesRequest',
            response_type_name='Step',
        ),
        'ProjectsHistoriesExecutionsStepsPerfMetricsSummaryCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfMetricsSummary.create',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfMetricsSummary',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=[],
            request_type_name='PerfMetricsSummary',
            response_type_name='PerfMetricsSummary',
        ),
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfSampleSeries.create',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfSampleSeries',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=[],
            request_type_name='PerfSampleSeries',
            response_type_name='PerfSampleSeries',
        ),
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfSampleSeries.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfSampleSeries/{sampleSeriesId}',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            path_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            query_params=[],
            request_type_name=None,
            response_type_name='PerfSampleSeries',
        ),
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfSampleSeries.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfSampleSeries',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=['filter'],
            request_type_name=None,
            response_type_name='ListPerfSampleSeriesResponse',
        ),
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesBatchCreate': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfSampleSeries.samples.batchCreate',
            http_method='POST',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfSampleSeries/{sampleSeriesId}/samples:batchCreate',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            path_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            query_params=[],
            request_type_name='BatchCreatePerfSamplesRequest',
            response_type_name='BatchCreatePerfSamplesResponse',
        ),
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.perfSampleSeries.samples.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/perfSampleSeries/{sampleSeriesId}/samples',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            path_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'sampleSeriesId',
            ],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListPerfSamplesResponse',
        ),
        'ProjectsHistoriesExecutionsStepsTestCasesGet': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.testCases.get',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/testCases/{testCaseId}',
            ordered_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'testCaseId',
            ],
            path_params=[
                'projectId',
                'historyId',
                'executionId',
                'stepId',
                'testCaseId',
            ],
            query_params=[],
            request_type_name=None,
            response_type_name='TestCase',
        ),
        'ProjectsHistoriesExecutionsStepsTestCasesList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.testCases.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/testCases',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListTestCasesResponse',
        ),
        'ProjectsHistoriesExecutionsStepsThumbnailsList': base_api.ApiMethodInfo(
            method_id='toolresults.projects.histories.executions.steps.thumbnails.list',
            http_method='GET',
            relative_path='toolresults/v1beta3/projects/{projectId}/histories/{historyId}/executions/{executionId}/steps/{stepId}/thumbnails',
            ordered_params=['projectId', 'historyId', 'executionId', 'stepId'],
            path_params=['projectId', 'historyId', 'executionId', 'stepId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListStepThumbnailsResponse',
        ),
    }

  def ProjectsGetSettings(self, projectId):
    r"""Gets the Tool Results settings for a project. May return any of the
    following canonical error codes: - PERMISSION_DENIED - if the user is not
    authorized to read from project

    Args:
      projectId: (str) A Project id. Required.

    Returns:
      (ProjectSettings) The response message.
    """
    config = self.GetMethodConfig('ProjectsGetSettings')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
        },
    )

  def ProjectsInitializeSettings(self, projectId):
    r"""Creates resources for settings which have not yet been set. Currently,
    this creates a single resource: a Google Cloud Storage bucket, to be used as
    the default bucket for this project. The bucket is created in an FTL-own
    storage project. Except for in rare cases, calling this method in parallel
    from multiple clients will only create a single bucket. In order to avoid
    unnecessary storage charges, the bucket is configured to automatically
    delete objects older than 90 days. The bucket is created with the following
    permissions: - Owner access for owners of central storage project
    (FTL-owned) - Writer access for owners/editors of customer project - Reader
    access for viewers of customer project The default ACL on objects created in
    the bucket is: - Owner access for owners of central storage project - Reader
    access for owners/editors/viewers of customer project See Google Cloud
    Storage documentation for more details. If there is already a default bucket
    set and the project can access the bucket, this call does nothing. However,
    if the project doesn't have the permission to access the bucket or the
    bucket is deleted, a new bucket will be created. May return any canonical
    error codes, including the following: - PERMISSION_DENIED - if the user is
    not authorized to write to project - Any error code raised by Google Cloud
    Storage

    Args:
      projectId: (str) A Project id. Required.

    Returns:
      (ProjectSettings) The response message.
    """
    config = self.GetMethodConfig('ProjectsInitializeSettings')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
        },
    )

  def ProjectsHistoriesCreate(self, projectId, request, requestId=None):
    r"""Creates a History. The returned History will have the id set. May return
    any of the following canonical error codes: - PERMISSION_DENIED - if the
    user is not authorized to write to project - INVALID_ARGUMENT - if the
    request is malformed - NOT_FOUND - if the containing project does not exist

    Args:
      projectId: (str) A Project id. Required.
      request: (History) A History represents a sorted list of Executions
        ordered by the start_timestamp_millis field (descending). It can be used
        to group all the Executions of a continuous build. Note that the
        ordering only operates on one-dimension. If a repository has multiple
        branches, it means that multiple histories will need to be used in order
        to order Executions per branch.
      requestId: (str) A unique request ID for server to detect duplicated
        requests. For example, a UUID. Optional, but strongly recommended.

    Returns:
      (History) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
        },
        query_params={
            'requestId': requestId,
        },
        request=request,
    )

  def ProjectsHistoriesGet(self, projectId, historyId):
    r"""Gets a History. May return any of the following canonical error codes: -
    PERMISSION_DENIED - if the user is not authorized to read project -
    INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if the History
    does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.

    Returns:
      (History) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
        },
    )

  def ProjectsHistoriesList(
      self, projectId, filterByName=None, pageSize=None, pageToken=None):
    r"""Lists Histories for a given Project. The histories are sorted by
    modification time in descending order. The history_id key will be used to
    order the history with the same modification time. May return any of the
    following canonical error codes: - PERMISSION_DENIED - if the user is not
    authorized to read project - INVALID_ARGUMENT - if the request is malformed
    - NOT_FOUND - if the History does not exist

    Args:
      projectId: (str) A Project id. Required.
      filterByName: (str) If set, only return histories with the given name.
        Optional.
      pageSize: (int) The maximum number of Histories to fetch. Default value:
        20. The server will use this default if the field is not set or has a
        value of 0. Any value greater than 100 will be treated as 100. Optional.
      pageToken: (str) A continuation token to resume the query at the next
        item. Optional.

    Returns:
      (ListHistoriesResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
        },
        query_params={
            'filterByName': filterByName,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsCreate(
      self, projectId, historyId, request, requestId=None):
    r"""Creates an Execution. The returned Execution will have the id set. May
    return any of the following canonical error codes: - PERMISSION_DENIED - if
    the user is not authorized to write to project - INVALID_ARGUMENT - if the
    request is malformed - NOT_FOUND - if the containing History does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      request: (Execution) An Execution represents a collection of Steps. For
        instance, it could represent: - a mobile test executed across a range of
        device configurations - a jenkins job with a build step followed by a
        test step The maximum size of an execution message is 1 MiB. An
        Execution can be updated until its state is set to COMPLETE at which
        point it becomes immutable. Next tag: 16
      requestId: (str) A unique request ID for server to detect duplicated
        requests. For example, a UUID. Optional, but strongly recommended.

    Returns:
      (Execution) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
        },
        query_params={
            'requestId': requestId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsGet(self, projectId, historyId, executionId):
    r"""Gets an Execution. May return any of the following canonical error
    codes: - PERMISSION_DENIED - if the user is not authorized to write to
    project - INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if
    the Execution does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) An Execution id. Required.

    Returns:
      (Execution) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
    )

  def ProjectsHistoriesExecutionsList(
      self, projectId, historyId, pageSize=None, pageToken=None):
    r"""Lists Executions for a given History. The executions are sorted by
    creation_time in descending order. The execution_id key will be used to
    order the executions with the same creation_time. May return any of the
    following canonical error codes: - PERMISSION_DENIED - if the user is not
    authorized to read project - INVALID_ARGUMENT - if the request is malformed
    - NOT_FOUND - if the containing History does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      pageSize: (int) The maximum number of Executions to fetch. Default value:
        25. The server will use this default if the field is not set or has a
        value of 0. Optional.
      pageToken: (str) A continuation token to resume the query at the next
        item. Optional.

    Returns:
      (ListExecutionsResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsPatch(
      self, projectId, historyId, executionId, request, requestId=None):
    r"""Updates an existing Execution with the supplied partial entity. May
    return any of the following canonical error codes: - PERMISSION_DENIED - if
    the user is not authorized to write to project - INVALID_ARGUMENT - if the
    request is malformed - FAILED_PRECONDITION - if the requested state
    transition is illegal - NOT_FOUND - if the containing History does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) Required.
      executionId: (str) Required.
      request: (Execution) An Execution represents a collection of Steps. For
        instance, it could represent: - a mobile test executed across a range of
        device configurations - a jenkins job with a build step followed by a
        test step The maximum size of an execution message is 1 MiB. An
        Execution can be updated until its state is set to COMPLETE at which
        point it becomes immutable. Next tag: 16
      requestId: (str) A unique request ID for server to detect duplicated
        requests. For example, a UUID. Optional, but strongly recommended.

    Returns:
      (Execution) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsPatch')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
        query_params={
            'requestId': requestId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsClustersGet(
      self, projectId, historyId, executionId, clusterId):
    r"""Retrieves a single screenshot cluster by its ID

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) An Execution id. Required.
      clusterId: (str) A Cluster id Required.

    Returns:
      (ScreenshotCluster) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsClustersGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'clusterId': clusterId,
        },
    )

  def ProjectsHistoriesExecutionsClustersList(
      self, projectId, historyId, executionId):
    r"""Lists Screenshot Clusters Returns the list of screenshot clusters
    corresponding to an execution. Screenshot clusters are created after the
    execution is finished. Clusters are created from a set of screenshots.
    Between any two screenshots, a matching score is calculated based off their
    metadata that determines how similar they are. Screenshots are placed in the
    cluster that has screens which have the highest matching scores.

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) An Execution id. Required.

    Returns:
      (ListScreenshotClustersResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsClustersList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
    )

  def ProjectsHistoriesExecutionsEnvironmentsGet(
      self, projectId, historyId, executionId, environmentId):
    r"""Gets an Environment. May return any of the following canonical error
    codes: - PERMISSION_DENIED - if the user is not authorized to read project -
    INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if the
    Environment does not exist

    Args:
      projectId: (str) Required. A Project id.
      historyId: (str) Required. A History id.
      executionId: (str) Required. An Execution id.
      environmentId: (str) Required. An Environment id.

    Returns:
      (Environment) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsEnvironmentsGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'environmentId': environmentId,
        },
    )

  def ProjectsHistoriesExecutionsEnvironmentsList(
      self, projectId, historyId, executionId, pageSize=None, pageToken=None):
    r"""Lists Environments for a given Execution. The Environments are sorted by
    display name. May return any of the following canonical error codes: -
    PERMISSION_DENIED - if the user is not authorized to read project -
    INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if the
    containing Execution does not exist

    Args:
      projectId: (str) Required. A Project id.
      historyId: (str) Required. A History id.
      executionId: (str) Required. An Execution id.
      pageSize: (int) The maximum number of Environments to fetch. Default
        value: 25. The server will use this default if the field is not set or
        has a value of 0.
      pageToken: (str) A continuation token to resume the query at the next
        item.

    Returns:
      (ListEnvironmentsResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsEnvironmentsList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsStepsAccessibilityClusters(
      self, name, locale=None):
    r"""Lists accessibility clusters for a given Step May return any of the
    following canonical error codes: - PERMISSION_DENIED - if the user is not
    authorized to read project - INVALID_ARGUMENT - if the request is malformed
    - FAILED_PRECONDITION - if an argument in the request happens to be invalid;
    e.g. if the locale format is incorrect - NOT_FOUND - if the containing Step
    does not exist

    Args:
      name: (str) A full resource name of the step. For example,
        projects/my-project/histories/bh.1234567890abcdef/executions/
        1234567890123456789/steps/bs.1234567890abcdef Required.
      locale: (str) The accepted format is the canonical Unicode format with
        hyphen as a delimiter. Language must be lowercase, Language Script -
        Capitalized, Region - UPPERCASE. See
        http://www.unicode.org/reports/tr35/#Unicode_locale_identifier for
        details. Required.

    Returns:
      (ListStepAccessibilityClustersResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsAccessibilityClusters')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        query_params={
            'locale': locale,
        },
    )

  def ProjectsHistoriesExecutionsStepsCreate(
      self, projectId, historyId, executionId, request, requestId=None):
    r"""Creates a Step. The returned Step will have the id set. May return any
    of the following canonical error codes: - PERMISSION_DENIED - if the user is
    not authorized to write to project - INVALID_ARGUMENT - if the request is
    malformed - FAILED_PRECONDITION - if the step is too large (more than 10Mib)
    - NOT_FOUND - if the containing Execution does not exist

    Args:
      projectId: (str) Required. A Project id.
      historyId: (str) Required. A History id.
      executionId: (str) Required. An Execution id.
      request: (Step) A Step represents a single operation performed as part of
        Execution. A step can be used to represent the execution of a tool ( for
        example a test runner execution or an execution of a compiler). Steps
        can overlap (for instance two steps might have the same start time if
        some operations are done in parallel). Here is an example, let's
        consider that we have a continuous build is executing a test runner for
        each iteration. The workflow would look like: - user creates a Execution
        with id 1 - user creates an TestExecutionStep with id 100 for Execution
        1 - user update TestExecutionStep with id 100 to add a raw xml log + the
        service parses the xml logs and returns a TestExecutionStep with updated
        TestResult(s). - user update the status of TestExecutionStep with id 100
        to COMPLETE A Step can be updated until its state is set to COMPLETE at
        which points it becomes immutable. Next tag: 27
      requestId: (str) A unique request ID for server to detect duplicated
        requests. For example, a UUID. Optional, but strongly recommended.

    Returns:
      (Step) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsStepsCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
        query_params={
            'requestId': requestId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsGet(
      self, projectId, historyId, executionId, stepId):
    r"""Gets a Step. May return any of the following canonical error codes: -
    PERMISSION_DENIED - if the user is not authorized to read project -
    INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if the Step
    does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id. Required.
      stepId: (str) A Step id. Required.

    Returns:
      (Step) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsStepsGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
    )

  def ProjectsHistoriesExecutionsStepsGetPerfMetricsSummary(
      self, projectId, historyId, executionId, stepId):
    r"""Retrieves a PerfMetricsSummary. May return any of the following error
    code(s): - NOT_FOUND - The specified PerfMetricsSummary does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.

    Returns:
      (PerfMetricsSummary) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsGetPerfMetricsSummary')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
    )

  def ProjectsHistoriesExecutionsStepsList(
      self, projectId, historyId, executionId, pageSize=None, pageToken=None):
    r"""Lists Steps for a given Execution. The steps are sorted by creation_time
    in descending order. The step_id key will be used to order the steps with
    the same creation_time. May return any of the following canonical error
    codes: - PERMISSION_DENIED - if the user is not authorized to read project -
    INVALID_ARGUMENT - if the request is malformed - FAILED_PRECONDITION - if an
    argument in the request happens to be invalid; e.g. if an attempt is made to
    list the children of a nonexistent Step - NOT_FOUND - if the containing
    Execution does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id. Required.
      pageSize: (int) The maximum number of Steps to fetch. Default value: 25.
        The server will use this default if the field is not set or has a value
        of 0. Optional.
      pageToken: (str) A continuation token to resume the query at the next
        item. Optional.

    Returns:
      (ListStepsResponse) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsStepsList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsStepsPatch(
      self, projectId, historyId, executionId, stepId, request,
      requestId=None):
    r"""Updates an existing Step with the supplied partial entity. May return
    any of the following canonical error codes: - PERMISSION_DENIED - if the
    user is not authorized to write project - INVALID_ARGUMENT - if the request
    is malformed - FAILED_PRECONDITION - if the requested state transition is
    illegal (e.g try to upload a duplicate xml file), if the updated step is too
    large (more than 10Mib) - NOT_FOUND - if the containing Execution does not
    exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id. Required.
      stepId: (str) A Step id. Required.
      request: (Step) A Step represents a single operation performed as part of
        Execution. A step can be used to represent the execution of a tool ( for
        example a test runner execution or an execution of a compiler). Steps
        can overlap (for instance two steps might have the same start time if
        some operations are done in parallel). Here is an example, let's
        consider that we have a continuous build is executing a test runner for
        each iteration. The workflow would look like: - user creates a Execution
        with id 1 - user creates an TestExecutionStep with id 100 for Execution
        1 - user update TestExecutionStep with id 100 to add a raw xml log + the
        service parses the xml logs and returns a TestExecutionStep with updated
        TestResult(s). - user update the status of TestExecutionStep with id 100
        to COMPLETE A Step can be updated until its state is set to COMPLETE at
        which points it becomes immutable. Next tag: 27
      requestId: (str) A unique request ID for server to detect duplicated
        requests. For example, a UUID. Optional, but strongly recommended.

    Returns:
      (Step) The response message.
    """
    config = self.GetMethodConfig('ProjectsHistoriesExecutionsStepsPatch')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        query_params={
            'requestId': requestId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsPublishXunitXmlFiles(
      self, projectId, historyId, executionId, stepId, request):
    r"""Publish xml files to an existing Step. May return any of the following
    canonical error codes: - PERMISSION_DENIED - if the user is not authorized
    to write project - INVALID_ARGUMENT - if the request is malformed -
    FAILED_PRECONDITION - if the requested state transition is illegal, e.g try
    to upload a duplicate xml file or a file too large. - NOT_FOUND - if the
    containing Execution does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id. Required.
      stepId: (str) A Step id. Note: This step must include a TestExecutionStep.
        Required.
      request: (PublishXunitXmlFilesRequest) Request message for
        StepService.PublishXunitXmlFiles.

    Returns:
      (Step) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPublishXunitXmlFiles')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsPerfMetricsSummaryCreate(
      self, projectId, historyId, executionId, stepId, request):
    r"""Creates a PerfMetricsSummary resource. Returns the existing one if it
    has already been created. May return any of the following error code(s): -
    NOT_FOUND - The containing Step does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      request: (PerfMetricsSummary) A summary of perf metrics collected and
        performance environment info

    Returns:
      (PerfMetricsSummary) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfMetricsSummaryCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsPerfSampleSeriesCreate(
      self, projectId, historyId, executionId, stepId, request):
    r"""Creates a PerfSampleSeries. May return any of the following error
    code(s): - ALREADY_EXISTS - PerfMetricSummary already exists for the given
    Step - NOT_FOUND - The containing Step does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      request: (PerfSampleSeries) Resource representing a collection of
        performance samples (or data points)

    Returns:
      (PerfSampleSeries) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsPerfSampleSeriesGet(
      self, projectId, historyId, executionId, stepId, sampleSeriesId):
    r"""Gets a PerfSampleSeries. May return any of the following error code(s):
    - NOT_FOUND - The specified PerfSampleSeries does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      sampleSeriesId: (str) A sample series id

    Returns:
      (PerfSampleSeries) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
            'sampleSeriesId': sampleSeriesId,
        },
    )

  def ProjectsHistoriesExecutionsStepsPerfSampleSeriesList(
      self, projectId, historyId, executionId, stepId, filter=None):
    r"""Lists PerfSampleSeries for a given Step. The request provides an
    optional filter which specifies one or more PerfMetricsType to include in
    the result; if none returns all. The resulting PerfSampleSeries are sorted
    by ids. May return any of the following canonical error codes: - NOT_FOUND -
    The containing Step does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      filter: (str) Specify one or more PerfMetricType values such as CPU to
        filter the result

    Returns:
      (ListPerfSampleSeriesResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        query_params={
            'filter': filter,
        },
    )

  def ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesBatchCreate(
      self, projectId, historyId, executionId, stepId, sampleSeriesId,
      request):
    r"""Creates a batch of PerfSamples - a client can submit multiple batches of
    Perf Samples through repeated calls to this method in order to split up a
    large request payload - duplicates and existing timestamp entries will be
    ignored. - the batch operation may partially succeed - the set of elements
    successfully inserted is returned in the response (omits items which already
    existed in the database). May return any of the following canonical error
    codes: - NOT_FOUND - The containing PerfSampleSeries does not exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      sampleSeriesId: (str) A sample series id
      request: (BatchCreatePerfSamplesRequest) The request must provide up to a
        maximum of 5000 samples to be created; a larger sample size will cause
        an INVALID_ARGUMENT error

    Returns:
      (BatchCreatePerfSamplesResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesBatchCreate')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
            'sampleSeriesId': sampleSeriesId,
        },
        request=request,
    )

  def ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesList(
      self, projectId, historyId, executionId, stepId, sampleSeriesId,
      pageSize=None, pageToken=None):
    r"""Lists the Performance Samples of a given Sample Series - The list
    results are sorted by timestamps ascending - The default page size is 500
    samples; and maximum size allowed 5000 - The response token indicates the
    last returned PerfSample timestamp - When the results size exceeds the page
    size, submit a subsequent request including the page token to return the
    rest of the samples up to the page limit May return any of the following
    canonical error codes: - OUT_OF_RANGE - The specified request page_token is
    out of valid range - NOT_FOUND - The containing PerfSampleSeries does not
    exist

    Args:
      projectId: (str) The cloud project
      historyId: (str) A tool results history ID.
      executionId: (str) A tool results execution ID.
      stepId: (str) A tool results step ID.
      sampleSeriesId: (str) A sample series id
      pageSize: (int) The default page size is 500 samples, and the maximum size
        is 5000. If the page_size is greater than 5000, the effective page size
        will be 5000
      pageToken: (str) Optional, the next_page_token returned in the previous
        response

    Returns:
      (ListPerfSamplesResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsPerfSampleSeriesSamplesList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
            'sampleSeriesId': sampleSeriesId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsStepsTestCasesGet(
      self, projectId, historyId, executionId, stepId, testCaseId):
    r"""Gets details of a Test Case for a Step. Experimental test cases API.
    Still in active development. May return any of the following canonical error
    codes: - PERMISSION_DENIED - if the user is not authorized to write to
    project - INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if
    the containing Test Case does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id Required.
      stepId: (str) A Step id. Note: This step must include a TestExecutionStep.
        Required.
      testCaseId: (str) A Test Case id. Required.

    Returns:
      (TestCase) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsTestCasesGet')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
            'testCaseId': testCaseId,
        },
    )

  def ProjectsHistoriesExecutionsStepsTestCasesList(
      self, projectId, historyId, executionId, stepId, pageSize=None,
      pageToken=None):
    r"""Lists Test Cases attached to a Step. Experimental test cases API. Still
    in active development. May return any of the following canonical error
    codes: - PERMISSION_DENIED - if the user is not authorized to write to
    project - INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if
    the containing Step does not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) A Execution id Required.
      stepId: (str) A Step id. Note: This step must include a TestExecutionStep.
        Required.
      pageSize: (int) The maximum number of TestCases to fetch. Default value:
        100. The server will use this default if the field is not set or has a
        value of 0. Optional.
      pageToken: (str) A continuation token to resume the query at the next
        item. Optional.

    Returns:
      (ListTestCasesResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsTestCasesList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def ProjectsHistoriesExecutionsStepsThumbnailsList(
      self, projectId, historyId, executionId, stepId, pageSize=None,
      pageToken=None):
    r"""Lists thumbnails of images attached to a step. May return any of the
    following canonical error codes: - PERMISSION_DENIED - if the user is not
    authorized to read from the project, or from any of the images -
    INVALID_ARGUMENT - if the request is malformed - NOT_FOUND - if the step
    does not exist, or if any of the images do not exist

    Args:
      projectId: (str) A Project id. Required.
      historyId: (str) A History id. Required.
      executionId: (str) An Execution id. Required.
      stepId: (str) A Step id. Required.
      pageSize: (int) The maximum number of thumbnails to fetch. Default value:
        50. The server will use this default if the field is not set or has a
        value of 0. Optional.
      pageToken: (str) A continuation token to resume the query at the next
        item. Optional.

    Returns:
      (ListStepThumbnailsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'ProjectsHistoriesExecutionsStepsThumbnailsList')
    return self._RunMethod(
        config,
        path_params={
            'projectId': projectId,
            'historyId': historyId,
            'executionId': executionId,
            'stepId': stepId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )


Toolresults = ToolresultsV1beta3
