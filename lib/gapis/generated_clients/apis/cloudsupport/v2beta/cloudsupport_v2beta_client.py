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
"""Generated client library for cloudsupport version v2beta."""
# NOTE: This file is autogenerated and should not be edited by hand.

from gapis.api_lib.util import base_api
from gapis.generated_clients.apis.cloudsupport.v2beta import cloudsupport_v2beta_messages as messages


class CloudsupportV2beta(base_api.BaseApiClient):
  """Generated client library for service cloudsupport version v2beta."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://cloudsupport.googleapis.com/'
  MTLS_BASE_URL = 'https://cloudsupport.mtls.googleapis.com/'

  _PACKAGE = 'cloudsupport'
  _SCOPES = ['https://www.googleapis.com/auth/cloud-platform']
  _VERSION = 'v2beta'
  _CLIENT_CLASS_NAME = 'CloudsupportV2beta'

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Create a new cloudsupport handle."""
    url = url or self.BASE_URL
    super(CloudsupportV2beta, self).__init__(
        url, credentials=credentials, get_credentials=get_credentials,
        session=session, additional_http_headers=additional_http_headers,
        default_global_params=default_global_params,
        check_response_func=check_response_func)
    self._method_configs = {
        'AttachmentsCreate': base_api.ApiMethodInfo(
            method_id='cloudsupport.attachments.create',
            http_method='POST',
            relative_path='v2beta/{+parent}/attachments',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[],
            request_type_name='CreateAttachmentRequest',
            response_type_name='Attachment',
        ),
        'CaseClassificationsSearch': base_api.ApiMethodInfo(
            method_id='cloudsupport.caseClassifications.search',
            http_method='GET',
            relative_path='v2beta/caseClassifications:search',
            ordered_params=[],
            path_params=[],
            query_params=['pageSize', 'pageToken', 'query'],
            request_type_name=None,
            response_type_name='SearchCaseClassificationsResponse',
        ),
        'CasesClose': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.close',
            http_method='POST',
            relative_path='v2beta/{+name}:close',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='CloseCaseRequest',
            response_type_name='Case',
        ),
        'CasesCreate': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.create',
            http_method='POST',
            relative_path='v2beta/{+parent}/cases',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[],
            request_type_name='Case',
            response_type_name='Case',
        ),
        'CasesEscalate': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.escalate',
            http_method='POST',
            relative_path='v2beta/{+name}:escalate',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name='EscalateCaseRequest',
            response_type_name='Case',
        ),
        'CasesGet': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.get',
            http_method='GET',
            relative_path='v2beta/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Case',
        ),
        'CasesList': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.list',
            http_method='GET',
            relative_path='v2beta/{+parent}/cases',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCasesResponse',
        ),
        'CasesPatch': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.patch',
            http_method='PATCH',
            relative_path='v2beta/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=['updateMask'],
            request_type_name='Case',
            response_type_name='Case',
        ),
        'CasesSearch': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.search',
            http_method='GET',
            relative_path='v2beta/cases:search',
            ordered_params=[],
            path_params=[],
            query_params=['pageSize', 'pageToken', 'query'],
            request_type_name=None,
            response_type_name='SearchCasesResponse',
        ),
        'CasesAttachmentsList': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.attachments.list',
            http_method='GET',
            relative_path='v2beta/{+parent}/attachments',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListAttachmentsResponse',
        ),
        'CasesCommentsCreate': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.comments.create',
            http_method='POST',
            relative_path='v2beta/{+parent}/comments',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[],
            request_type_name='Comment',
            response_type_name='Comment',
        ),
        'CasesCommentsList': base_api.ApiMethodInfo(
            method_id='cloudsupport.cases.comments.list',
            http_method='GET',
            relative_path='v2beta/{+parent}/comments',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCommentsResponse',
        ),
        'MediaDownload': base_api.ApiMethodInfo(
            method_id='cloudsupport.media.download',
            http_method='GET',
            relative_path='v2beta/{+name}:download',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Media',
        ),
        'MediaUpload': base_api.ApiMethodInfo(
            method_id='cloudsupport.media.upload',
            http_method='POST',
            relative_path='v2beta/{+parent}/attachments',
            ordered_params=['parent'],
            path_params=['parent'],
            query_params=[],
            request_type_name='CreateAttachmentRequest',
            response_type_name='Attachment',
        ),
    }

  def AttachmentsCreate(self, parent, request):
    r"""Create a file attachment on a case or Cloud resource. The attachment
    object must have the following fields set: filename.

    Args:
      parent: (str) Required. The resource name of the case (or case parent) to
        which the attachment should be attached.
      request: (CreateAttachmentRequest) The request message for the
        CreateAttachment endpoint.

    Returns:
      (Attachment) The response message.
    """
    config = self.GetMethodConfig('AttachmentsCreate')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        request=request,
    )

  def CaseClassificationsSearch(
      self, pageSize=None, pageToken=None, query=None):
    r"""Retrieve valid classifications to be used when creating a support case.
    The classications are hierarchical, with each classification containing all
    levels of the hierarchy, separated by " > ". For example "Technical Issue >
    Compute > Compute Engine".

    Args:
      pageSize: (int) The maximum number of cases fetched with each request.
      pageToken: (str) A token identifying the page of results to return. If
        unspecified, the first page is retrieved.
      query: (str) An expression written in the Cloud filter language. If
        non-empty, then only cases whose fields match the filter are returned.
        If empty, then no messages are filtered out.

    Returns:
      (SearchCaseClassificationsResponse) The response message.
    """
    config = self.GetMethodConfig('CaseClassificationsSearch')
    return self._RunMethod(
        config,
        path_params={},
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
            'query': query,
        },
    )

  def CasesClose(self, name, request):
    r"""Close the specified case.

    Args:
      name: (str) Required. The fully qualified name of the case resource to be
        closed.
      request: (CloseCaseRequest) The request message for the CloseCase
        endpoint.

    Returns:
      (Case) The response message.
    """
    config = self.GetMethodConfig('CasesClose')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def CasesCreate(self, parent, request):
    r"""Create a new case and associate it with the given Cloud resource. The
    case object must have the following fields set: display_name, description,
    classification, and severity.

    Args:
      parent: (str) Required. The name of the Cloud resource under which the
        case should be created.
      request: (Case) A support case.

    Returns:
      (Case) The response message.
    """
    config = self.GetMethodConfig('CasesCreate')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        request=request,
    )

  def CasesEscalate(self, name, request):
    r"""Escalate a case. Escalating a case will initiate the Cloud Support
    escalation management process. This operation is only available to certain
    Customer Care tiers. Go to https://cloud.google.com/support and look for
    'Technical support escalations' in the feature list to find out which tiers
    are able to perform escalations.

    Args:
      name: (str) Required. The fully qualified name of the Case resource to be
        escalated.
      request: (EscalateCaseRequest) The request message for the EscalateCase
        endpoint.

    Returns:
      (Case) The response message.
    """
    config = self.GetMethodConfig('CasesEscalate')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
        request=request,
    )

  def CasesGet(self, name):
    r"""Retrieve the specified case.

    Args:
      name: (str) Required. The fully qualified name of a case to be retrieved.

    Returns:
      (Case) The response message.
    """
    config = self.GetMethodConfig('CasesGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def CasesList(self, parent, filter=None, pageSize=None, pageToken=None):
    r"""Retrieve all cases under the specified parent. Note: Listing cases under
    an Organization returns only the cases directly parented by that
    organization. To retrieve all cases under an organization, including cases
    parented by projects under that organization, use `cases.search`.

    Args:
      parent: (str) Required. The fully qualified name of parent resource to
        list cases under.
      filter: (str) An expression written in filter language. If non-empty, the
        query returns the cases that match the filter. Else, the query doesn't
        filter the cases. Filter expressions use the following fields with the
        operators equals (`=`) and `AND`: - `state`: The accepted values are
        `OPEN` or `CLOSED`. - `priority`: The accepted values are `P0`, `P1`,
        `P2`, `P3`, or `P4`. You can specify multiple values for priority using
        the `OR` operator. For example, `priority=P1 OR priority=P2`. -
        [DEPRECATED] `severity`: The accepted values are `S0`, `S1`, `S2`, `S3`,
        or `S4`. - `creator.email`: The email address of the case creator.
        Examples: - `state=CLOSED` - `state=OPEN AND
        creator.email="tester@example.com"` - `state=OPEN AND (priority=P0 OR
        priority=P1)`
      pageSize: (int) The maximum number of cases fetched with each request.
        Defaults to 10.
      pageToken: (str) A token identifying the page of results to return. If
        unspecified, the first page is retrieved.

    Returns:
      (ListCasesResponse) The response message.
    """
    config = self.GetMethodConfig('CasesList')
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

  def CasesPatch(self, name, request, updateMask=None):
    r"""Update the specified case. Only a subset of fields can be updated.

    Args:
      name: (str) The resource name for the case.
      request: (Case) A support case.
      updateMask: (str) A list of attributes of the case object that should be
        updated as part of this request. Supported values are severity,
        display_name, and subscriber_email_addresses. If no fields are
        specified, all supported fields are updated. WARNING: If you do not
        provide a field mask, then you may accidentally clear some fields. For
        example, if you leave field mask empty and do not provide a value for
        subscriber_email_addresses, then subscriber_email_addresses is updated
        to empty.

    Returns:
      (Case) The response message.
    """
    config = self.GetMethodConfig('CasesPatch')
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

  def CasesSearch(self, pageSize=None, pageToken=None, query=None):
    r"""Search cases using the specified query.

    Args:
      pageSize: (int) The maximum number of cases fetched with each request. The
        default page size is 10.
      pageToken: (str) A token identifying the page of results to return. If
        unspecified, the first page is retrieved.
      query: (str) An expression written in filter language. A query uses the
        following fields with the operators equals (`=`) and `AND`: -
        `organization`: An organization name in the form `organizations/`. -
        `project`: A project name in the form `projects/`. - `state`: The
        accepted values are `OPEN` or `CLOSED`. - `priority`: The accepted
        values are `P0`, `P1`, `P2`, `P3`, or `P4`. You can specify multiple
        values for priority using the `OR` operator. For example, `priority=P1
        OR priority=P2`. - [DEPRECATED] `severity`: The accepted values are
        `S0`, `S1`, `S2`, `S3`, or `S4`. - `creator.email`: The email address of
        the case creator. - `billingAccount`: A billing account in the form
        `billingAccounts/` You must specify eitehr `organization` or `project`.
        To search across `displayName`, `description`, and comments, use a
        global restriction with no keyword or operator. For example, `"my
        search"`. To search only cases updated after a certain date, use
        `update_time` retricted with that particular date, time, and timezone in
        ISO datetime format. For example,
        `update_time>"2020-01-01T00:00:00-05:00"`. `update_time` only supports
        the greater than operator (`>`). Examples: -
        `organization="organizations/123456789"` -
        `project="projects/my-project-id"` - `project="projects/123456789"` -
        `billing_account="billingAccounts/123456-A0B0C0-CUZ789"` -
        `organization="organizations/123456789" AND state=CLOSED` -
        `project="projects/my-project-id" AND
        creator.email="tester@example.com"` - `project="projects/my-project-id"
        AND (priority=P0 OR priority=P1)`

    Returns:
      (SearchCasesResponse) The response message.
    """
    config = self.GetMethodConfig('CasesSearch')
    return self._RunMethod(
        config,
        path_params={},
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
            'query': query,
        },
    )

  def CasesAttachmentsList(self, parent, pageSize=None, pageToken=None):
    r"""Retrieve all attachments associated with a support case.

    Args:
      parent: (str) Required. The resource name of Case object for which
        attachments should be listed.
      pageSize: (int) The maximum number of attachments fetched with each
        request. If not provided, the default is 10. The maximum page size that
        will be returned is 100.
      pageToken: (str) A token identifying the page of results to return. If
        unspecified, the first page is retrieved.

    Returns:
      (ListAttachmentsResponse) The response message.
    """
    config = self.GetMethodConfig('CasesAttachmentsList')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def CasesCommentsCreate(self, parent, request):
    r"""Add a new comment to the specified Case. The comment object must have
    the following fields set: body.

    Args:
      parent: (str) Required. The resource name of Case to which this comment
        should be added.
      request: (Comment) A comment associated with a support case.

    Returns:
      (Comment) The response message.
    """
    config = self.GetMethodConfig('CasesCommentsCreate')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        request=request,
    )

  def CasesCommentsList(self, parent, pageSize=None, pageToken=None):
    r"""Retrieve all Comments associated with the Case object.

    Args:
      parent: (str) Required. The resource name of Case object for which
        comments should be listed.
      pageSize: (int) The maximum number of comments fetched with each request.
        Defaults to 10.
      pageToken: (str) A token identifying the page of results to return. If
        unspecified, the first page is retrieved.

    Returns:
      (ListCommentsResponse) The response message.
    """
    config = self.GetMethodConfig('CasesCommentsList')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def MediaDownload(self, name):
    r"""Download a file attachment on a case. Note: HTTP requests must append
    "?alt=media" to the URL.

    Args:
      name: (str) The resource name of the attachment to be downloaded.

    Returns:
      (Media) The response message.
    """
    config = self.GetMethodConfig('MediaDownload')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def MediaUpload(self, parent, request):
    r"""Create a file attachment on a case or Cloud resource. The attachment
    object must have the following fields set: filename.

    Args:
      parent: (str) Required. The resource name of the case (or case parent) to
        which the attachment should be attached.
      request: (CreateAttachmentRequest) The request message for the
        CreateAttachment endpoint.

    Returns:
      (Attachment) The response message.
    """
    config = self.GetMethodConfig('MediaUpload')
    return self._RunMethod(
        config,
        path_params={
            'parent': parent,
        },
        request=request,
    )


Cloudsupport = CloudsupportV2beta
