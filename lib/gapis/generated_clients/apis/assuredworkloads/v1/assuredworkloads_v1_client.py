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
"""Generated client library for assuredworkloads version v1."""
# NOTE: This file is autogenerated and should not be edited by hand.

from gapis.api_lib.util import base_api
from gapis.generated_clients.apis.assuredworkloads.v1 import assuredworkloads_v1_messages as messages


class AssuredworkloadsV1(base_api.BaseApiClient):
  """Generated client library for service assuredworkloads version v1."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://assuredworkloads.googleapis.com/'
  MTLS_BASE_URL = 'https://assuredworkloads.mtls.googleapis.com/'

  _PACKAGE = 'assuredworkloads'
  _SCOPES = ['https://www.googleapis.com/auth/cloud-platform']
  _VERSION = 'v1'
  _CLIENT_CLASS_NAME = 'AssuredworkloadsV1'

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Create a new assuredworkloads handle."""
    url = url or self.BASE_URL
    super(AssuredworkloadsV1, self).__init__(
        url, credentials=credentials, get_credentials=get_credentials,
        session=session, additional_http_headers=additional_http_headers,
        default_global_params=default_global_params,
        check_response_func=check_response_func)
    self._method_configs = {
        'OrganizationsLocationsOperationsGet': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.operations.get',
            http_method='GET',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='GoogleLongrunningOperation',
        ),
        'OrganizationsLocationsOperationsList': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.operations.list',
            http_method='GET',
            relative_path='v1/{+name}/operations',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='GoogleLongrunningListOperationsResponse',
        ),
        'OrganizationsLocationsWorkloadsCreate': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.create',
            http_method='POST',
            relative_path='v1/{+parent}/workloads',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['externalId'],
            request_type_name='GoogleCloudAssuredworkloadsV1Workload',
            response_type_name='GoogleLongrunningOperation',
        ),
        'OrganizationsLocationsWorkloadsDelete': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.delete',
            http_method='DELETE',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['etag'],
            request_type_name=None,
            response_type_name='GoogleProtobufEmpty',
        ),
        'OrganizationsLocationsWorkloadsGet': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.get',
            http_method='GET',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='GoogleCloudAssuredworkloadsV1Workload',
        ),
        'OrganizationsLocationsWorkloadsList': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.list',
            http_method='GET',
            relative_path='v1/{+parent}/workloads',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='GoogleCloudAssuredworkloadsV1ListWorkloadsResponse',
        ),
        'OrganizationsLocationsWorkloadsMutatePartnerPermissions': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.mutatePartnerPermissions',
            http_method='PATCH',
            relative_path='v1/{+name}:mutatePartnerPermissions',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='GoogleCloudAssuredworkloadsV1MutatePartnerPermissionsRequest',
            response_type_name='GoogleCloudAssuredworkloadsV1Workload',
        ),
        'OrganizationsLocationsWorkloadsPatch': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.patch',
            http_method='PATCH',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['updateMask'],
            request_type_name='GoogleCloudAssuredworkloadsV1Workload',
            response_type_name='GoogleCloudAssuredworkloadsV1Workload',
        ),
        'OrganizationsLocationsWorkloadsRestrictAllowedResources': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.restrictAllowedResources',
            http_method='POST',
            relative_path='v1/{+name}:restrictAllowedResources',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='GoogleCloudAssuredworkloadsV1RestrictAllowedResourcesRequest',
            response_type_name='GoogleCloudAssuredworkloadsV1RestrictAllowedResourcesResponse',
        ),
        'OrganizationsLocationsWorkloadsViolationsAcknowledge': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.violations.acknowledge',
            http_method='POST',
            relative_path='v1/{+name}:acknowledge',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='GoogleCloudAssuredworkloadsV1AcknowledgeViolationRequest',
            response_type_name='GoogleCloudAssuredworkloadsV1AcknowledgeViolationResponse',
        ),
        'OrganizationsLocationsWorkloadsViolationsGet': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.violations.get',
            http_method='GET',
            relative_path='v1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='GoogleCloudAssuredworkloadsV1Violation',
        ),
        'OrganizationsLocationsWorkloadsViolationsList': base_api.ApiMethodInfo(
            method_id='assuredworkloads.organizations.locations.workloads.violations.list',
            http_method='GET',
            relative_path='v1/{+parent}/violations',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[
                'filter',
                'interval.endTime',
                'interval.startTime',
                'pageSize',
                'pageToken',
            ],
            request_type_name=None,
            response_type_name='GoogleCloudAssuredworkloadsV1ListViolationsResponse',
        ),
    }

  def OrganizationsLocationsOperationsGet(self, name):
    r"""Gets the latest state of a long-running operation. Clients can use this
    method to poll the operation result at intervals as recommended by the API
    service.

    Args:
      name: (str) The name of the operation resource.

    Returns:
      (GoogleLongrunningOperation) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsOperationsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def OrganizationsLocationsOperationsList(
      self, name, filter=None, pageSize=None, pageToken=None):
    r"""Lists operations that match the specified filter in the request. If the
    server doesn't support this method, it returns `UNIMPLEMENTED`.

    Args:
      name: (str) The name of the operation's parent resource.
      filter: (str) The standard list filter.
      pageSize: (int) The standard list page size.
      pageToken: (str) The standard list page token.

    Returns:
      (GoogleLongrunningListOperationsResponse) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsOperationsList')
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

  def OrganizationsLocationsWorkloadsCreate(
      self, parent, request, externalId=None):
    r"""Creates Assured Workload.

    Args:
      parent: (str) Required. The resource name of the new Workload's parent.
        Must be of the form `organizations/{org_id}/locations/{location_id}`.
      request: (GoogleCloudAssuredworkloadsV1Workload) A Workload object for
        managing highly regulated workloads of cloud customers.
      externalId: (str) Optional. A identifier associated with the workload and
        underlying projects which allows for the break down of billing costs for
        a workload. The value provided for the identifier will add a label to
        the workload and contained projects with the identifier as the value.

    Returns:
      (GoogleLongrunningOperation) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsWorkloadsCreate')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        query_params={
            'externalId': externalId,
        },
        request=request,
    )

  def OrganizationsLocationsWorkloadsDelete(self, name, etag=None):
    r"""Deletes the workload. Make sure that workload's direct children are
    already in a deleted state, otherwise the request will fail with a
    FAILED_PRECONDITION error.

    Args:
      name: (str) Required. The `name` field is used to identify the workload.
        Format:
        organizations/{org_id}/locations/{location_id}/workloads/{workload_id}
      etag: (str) Optional. The etag of the workload. If this is provided, it
        must match the server's etag.

    Returns:
      (GoogleProtobufEmpty) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsWorkloadsDelete')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        query_params={
            'etag': etag,
        },
    )

  def OrganizationsLocationsWorkloadsGet(self, name):
    r"""Gets Assured Workload associated with a CRM Node

    Args:
      name: (str) Required. The resource name of the Workload to fetch. This is
        the workload's relative path in the API, formatted as
        "organizations/{organization_id}/locations/{location_id}/workloads/{workload_id}".
        For example,
        "organizations/123/locations/us-east1/workloads/assured-workload-1".

    Returns:
      (GoogleCloudAssuredworkloadsV1Workload) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsWorkloadsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def OrganizationsLocationsWorkloadsList(
      self, parent, filter=None, pageSize=None, pageToken=None):
    r"""Lists Assured Workloads under a CRM Node.

    Args:
      parent: (str) Required. Parent Resource to list workloads from. Must be of
        the form `organizations/{org_id}/locations/{location}`.
      filter: (str) A custom filter for filtering by properties of a workload.
        At this time, only filtering by labels is supported.
      pageSize: (int) Page size.
      pageToken: (str) Page token returned from previous request. Page token
        contains context from previous request. Page token needs to be passed in
        the second and following requests.

    Returns:
      (GoogleCloudAssuredworkloadsV1ListWorkloadsResponse) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsWorkloadsList')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        query_params={
            'filter': filter,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def OrganizationsLocationsWorkloadsMutatePartnerPermissions(
      self, name, request):
    r"""Update the permissions settings for an existing partner workload. For
    force updates don't set etag field in the Workload. Only one update
    operation per workload can be in progress.

    Args:
      name: (str) Required. The `name` field is used to identify the workload.
        Format:
        organizations/{org_id}/locations/{location_id}/workloads/{workload_id}
      request: (GoogleCloudAssuredworkloadsV1MutatePartnerPermissionsRequest)
        Request of updating permission settings for a partner workload.

    Returns:
      (GoogleCloudAssuredworkloadsV1Workload) The response message.
    """
    config = self.GetMethodConfig(
        'OrganizationsLocationsWorkloadsMutatePartnerPermissions')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def OrganizationsLocationsWorkloadsPatch(
      self, name, request, updateMask=None):
    r"""Updates an existing workload. Currently allows updating of workload
    display_name and labels. For force updates don't set etag field in the
    Workload. Only one update operation per workload can be in progress.

    Args:
      name: (str) Optional. The resource name of the workload. Format:
        organizations/{organization}/locations/{location}/workloads/{workload}
        Read-only.
      request: (GoogleCloudAssuredworkloadsV1Workload) A Workload object for
        managing highly regulated workloads of cloud customers.
      updateMask: (str) Required. The list of fields to be updated.

    Returns:
      (GoogleCloudAssuredworkloadsV1Workload) The response message.
    """
    config = self.GetMethodConfig('OrganizationsLocationsWorkloadsPatch')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        query_params={
            'updateMask': updateMask,
        },
        request=request,
    )

  def OrganizationsLocationsWorkloadsRestrictAllowedResources(
      self, name, request):
    r"""Restrict the list of resources allowed in the Workload environment. The
    current list of allowed products can be found at
    https://cloud.google.com/assured-workloads/docs/supported-products In
    addition to assuredworkloads.workload.update permission, the user should
    also have orgpolicy.policy.set permission on the folder resource to use this
    functionality.

    Args:
      name: (str) Required. The resource name of the Workload. This is the
        workloads's relative path in the API, formatted as
        "organizations/{organization_id}/locations/{location_id}/workloads/{workload_id}".
        For example,
        "organizations/123/locations/us-east1/workloads/assured-workload-1".
      request: (GoogleCloudAssuredworkloadsV1RestrictAllowedResourcesRequest)
        Request for restricting list of available resources in Workload
        environment.

    Returns:
      (GoogleCloudAssuredworkloadsV1RestrictAllowedResourcesResponse) The
        response message.
    """
    config = self.GetMethodConfig(
        'OrganizationsLocationsWorkloadsRestrictAllowedResources')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def OrganizationsLocationsWorkloadsViolationsAcknowledge(self, name, request):
    r"""Acknowledges an existing violation. By acknowledging a violation, users
    acknowledge the existence of a compliance violation in their workload and
    decide to ignore it due to a valid business justification. Acknowledgement
    is a permanent operation and it cannot be reverted.

    Args:
      name: (str) Required. The resource name of the Violation to acknowledge.
        Format:
        organizations/{organization}/locations/{location}/workloads/{workload}/violations/{violation}
      request: (GoogleCloudAssuredworkloadsV1AcknowledgeViolationRequest)
        Request for acknowledging the violation Next Id: 4

    Returns:
      (GoogleCloudAssuredworkloadsV1AcknowledgeViolationResponse) The response
        message.
    """
    config = self.GetMethodConfig(
        'OrganizationsLocationsWorkloadsViolationsAcknowledge')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def OrganizationsLocationsWorkloadsViolationsGet(self, name):
    r"""Retrieves Assured Workload Violation based on ID.

    Args:
      name: (str) Required. The resource name of the Violation to fetch (ie.
        Violation.name). Format:
        organizations/{organization}/locations/{location}/workloads/{workload}/violations/{violation}

    Returns:
      (GoogleCloudAssuredworkloadsV1Violation) The response message.
    """
    config = self.GetMethodConfig(
        'OrganizationsLocationsWorkloadsViolationsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def OrganizationsLocationsWorkloadsViolationsList(
      self, parent, filter=None, interval_endTime=None,
      interval_startTime=None, pageSize=None, pageToken=None):
    r"""Lists the Violations in the AssuredWorkload Environment. Callers may
    also choose to read across multiple Workloads as per
    [AIP-159](https://google.aip.dev/159) by using '-' (the hyphen or dash
    character) as a wildcard character instead of workload-id in the parent.
    Format `organizations/{org_id}/locations/{location}/workloads/-`

    Args:
      parent: (str) Required. The Workload name. Format
        `organizations/{org_id}/locations/{location}/workloads/{workload}`.
      filter: (str) Optional. A custom filter for filtering by the Violations
        properties.
      interval_endTime: (datetime.datetime) The end of the time window.
      interval_startTime: (datetime.datetime) The start of the time window.
      pageSize: (int) Optional. Page size.
      pageToken: (str) Optional. Page token returned from previous request.

    Returns:
      (GoogleCloudAssuredworkloadsV1ListViolationsResponse) The response
        message.
    """
    config = self.GetMethodConfig(
        'OrganizationsLocationsWorkloadsViolationsList')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        query_params={
            'filter': filter,
            'interval.endTime': interval_endTime,
            'interval.startTime': interval_startTime,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )


AssuredWorkloads = AssuredworkloadsV1
