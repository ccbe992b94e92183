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

r"""Generated message classes for cloudsupport version v2beta."""
# NOTE: This file is autogenerated and should not be edited by hand.

from apitools.base.protorpclite import message_types as _message_types
from apitools.base.protorpclite import messages as _messages


package = 'cloudsupport'


class Actor(_messages.Message):
  r"""An object containing information about the effective user and
  authenticated principal responsible for an action.

  Fields:
    displayName: The name to display for the actor. If not provided, it is
      inferred from credentials supplied during case creation. When an email is
      provided, a display name must also be provided. This will be obfuscated if
      the user is a Google Support agent.
    email: The email address of the actor. If not provided, it is inferred from
      credentials supplied during case creation. If the authenticated principal
      does not have an email address, one must be provided. When a name is
      provided, an email must also be provided. This will be obfuscated if the
      user is a Google Support agent.
    googleSupport: Output only. Whether the actor is a Google support actor.
  """

  displayName = _messages.StringField(1)
  email = _messages.StringField(2)
  googleSupport = _messages.BooleanField(3)


class Attachment(_messages.Message):
  r"""Represents a file attached to a support case.

  Fields:
    createTime: Output only. The time at which the attachment was created.
    creator: Output only. The user who uploaded the attachment. Note, the name
      and email will be obfuscated if the attachment was uploaded by Google
      support.
    filename: The filename of the attachment (e.g. `"graph.jpg"`).
    mimeType: Output only. The MIME type of the attachment (e.g. text/plain).
    name: Output only. The resource name of the attachment.
    sizeBytes: Output only. The size of the attachment in bytes.
  """

  createTime = _message_types.DateTimeField(1)
  creator = _messages.MessageField('Actor', 2)
  filename = _messages.StringField(3)
  mimeType = _messages.StringField(4)
  name = _messages.StringField(5)
  sizeBytes = _messages.IntegerField(6, variant=_messages.Variant.INT64)


class Blobstore2Info(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    blobGeneration: # gdata.* are outside protos with mising documentation
    blobId: # gdata.* are outside protos with mising documentation
    downloadReadHandle: # gdata.* are outside protos with mising documentation
    readToken: # gdata.* are outside protos with mising documentation
    uploadMetadataContainer: # gdata.* are outside protos with mising
      documentation
  """

  blobGeneration = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  blobId = _messages.StringField(2)
  downloadReadHandle = _messages.BytesField(3)
  readToken = _messages.StringField(4)
  uploadMetadataContainer = _messages.BytesField(5)


class Case(_messages.Message):
  r"""A support case.

  Enums:
    PriorityValueValuesEnum: The priority of this case. If this is set, do not
      set severity.
    SeverityValueValuesEnum: The severity of this case. Deprecated. Use priority
      instead.
    StateValueValuesEnum: Output only. The current status of the support case.

  Fields:
    classification: The issue classification applicable to this case.
    createTime: Output only. The time this case was created.
    creator: The user who created the case. Note: The name and email will be
      obfuscated if the case was created by Google Support.
    description: A broad description of the issue.
    displayName: The short summary of the issue reported in this case.
    escalated: Whether the case is currently escalated.
    languageCode: The language the user has requested to receive support in.
      This should be a BCP 47 language code (e.g., `"en"`, `"zh-CN"`, `"zh-TW"`,
      `"ja"`, `"ko"`). If no language or an unsupported language is specified,
      this field defaults to English (en). Language selection during case
      creation may affect your available support options. For a list of
      supported languages and their support working hours, see:
      https://cloud.google.com/support/docs/language-working-hours
    name: The resource name for the case.
    priority: The priority of this case. If this is set, do not set severity.
    severity: The severity of this case. Deprecated. Use priority instead.
    state: Output only. The current status of the support case.
    subscriberEmailAddresses: The email addresses to receive updates on this
      case.
    testCase: Whether this case was created for internal API testing and should
      not be acted on by the support team.
    timeZone: The timezone of the user who created the support case. It should
      be in a format IANA recognizes: https://www.iana.org/time-zones. There is
      no additional validation done by the API.
    updateTime: Output only. The time this case was last updated.
  """

  class PriorityValueValuesEnum(_messages.Enum):
    r"""The priority of this case. If this is set, do not set severity.

    Values:
      PRIORITY_UNSPECIFIED: <no description>
      P0: <no description>
      P1: <no description>
      P2: <no description>
      P3: <no description>
      P4: <no description>
    """
    PRIORITY_UNSPECIFIED = 0
    P0 = 1
    P1 = 2
    P2 = 3
    P3 = 4
    P4 = 5

  class SeverityValueValuesEnum(_messages.Enum):
    r"""The severity of this case. Deprecated. Use priority instead.

    Values:
      SEVERITY_UNSPECIFIED: <no description>
      S0: <no description>
      S1: <no description>
      S2: <no description>
      S3: <no description>
      S4: <no description>
    """
    SEVERITY_UNSPECIFIED = 0
    S0 = 1
    S1 = 2
    S2 = 3
    S3 = 4
    S4 = 5

  class StateValueValuesEnum(_messages.Enum):
    r"""Output only. The current status of the support case.

    Values:
      STATE_UNSPECIFIED: <no description>
      NEW: <no description>
      IN_PROGRESS_GOOGLE_SUPPORT: <no description>
      ACTION_REQUIRED: <no description>
      SOLUTION_PROVIDED: <no description>
      CLOSED: <no description>
    """
    STATE_UNSPECIFIED = 0
    NEW = 1
    IN_PROGRESS_GOOGLE_SUPPORT = 2
    ACTION_REQUIRED = 3
    SOLUTION_PROVIDED = 4
    CLOSED = 5

  classification = _messages.MessageField('CaseClassification', 1)
  createTime = _message_types.DateTimeField(2)
  creator = _messages.MessageField('Actor', 3)
  description = _messages.StringField(4)
  displayName = _messages.StringField(5)
  escalated = _messages.BooleanField(6)
  languageCode = _messages.StringField(7)
  name = _messages.StringField(8)
  priority = _messages.EnumField('PriorityValueValuesEnum', 9)
  severity = _messages.EnumField('SeverityValueValuesEnum', 10)
  state = _messages.EnumField('StateValueValuesEnum', 11)
  subscriberEmailAddresses = _messages.StringField(12, repeated=True)
  testCase = _messages.BooleanField(13)
  timeZone = _messages.StringField(14)
  updateTime = _message_types.DateTimeField(15)


class CaseClassification(_messages.Message):
  r"""A classification object with a product type and value.

  Fields:
    displayName: The display name of the classification.
    id: The unique ID for a classification. Must be specified for case creation.
      To retrieve valid classification IDs for case creation, use
      `caseClassifications.search`.
  """

  displayName = _messages.StringField(1)
  id = _messages.StringField(2)


class CloseCaseRequest(_messages.Message):
  r"""The request message for the CloseCase endpoint."""


class Comment(_messages.Message):
  r"""A comment associated with a support case.

  Fields:
    body: The full comment body. Maximum of 120000 characters. This can contain
      rich text syntax.
    createTime: Output only. The time when this comment was created.
    creator: Output only. The user or Google Support agent created this comment.
    name: Output only. The resource name for the comment.
    plainTextBody: Output only. An automatically generated plain text version of
      body with all rich text syntax stripped.
  """

  body = _messages.StringField(1)
  createTime = _message_types.DateTimeField(2)
  creator = _messages.MessageField('Actor', 3)
  name = _messages.StringField(4)
  plainTextBody = _messages.StringField(5)


class CompositeMedia(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Enums:
    ReferenceTypeValueValuesEnum: # gdata.* are outside protos with mising
      documentation

  Fields:
    blobRef: # gdata.* are outside protos with mising documentation
    blobstore2Info: # gdata.* are outside protos with mising documentation
    cosmoBinaryReference: # gdata.* are outside protos with mising documentation
    crc32cHash: # gdata.* are outside protos with mising documentation
    inline: # gdata.* are outside protos with mising documentation
    length: # gdata.* are outside protos with mising documentation
    md5Hash: # gdata.* are outside protos with mising documentation
    objectId: # gdata.* are outside protos with mising documentation
    path: # gdata.* are outside protos with mising documentation
    referenceType: # gdata.* are outside protos with mising documentation
    sha1Hash: # gdata.* are outside protos with mising documentation
  """

  class ReferenceTypeValueValuesEnum(_messages.Enum):
    r"""# gdata.* are outside protos with mising documentation

    Values:
      PATH: <no description>
      BLOB_REF: <no description>
      INLINE: <no description>
      BIGSTORE_REF: <no description>
      COSMO_BINARY_REFERENCE: <no description>
    """
    PATH = 0
    BLOB_REF = 1
    INLINE = 2
    BIGSTORE_REF = 3
    COSMO_BINARY_REFERENCE = 4

  blobRef = _messages.BytesField(1)
  blobstore2Info = _messages.MessageField('Blobstore2Info', 2)
  cosmoBinaryReference = _messages.BytesField(3)
  crc32cHash = _messages.IntegerField(4, variant=_messages.Variant.INT32)
  inline = _messages.BytesField(5)
  length = _messages.IntegerField(6, variant=_messages.Variant.INT64)
  md5Hash = _messages.BytesField(7)
  objectId = _messages.MessageField('ObjectId', 8)
  path = _messages.StringField(9)
  referenceType = _messages.EnumField('ReferenceTypeValueValuesEnum', 10)
  sha1Hash = _messages.BytesField(11)


class ContentTypeInfo(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    bestGuess: # gdata.* are outside protos with mising documentation
    fromBytes: # gdata.* are outside protos with mising documentation
    fromFileName: # gdata.* are outside protos with mising documentation
    fromHeader: # gdata.* are outside protos with mising documentation
    fromUrlPath: # gdata.* are outside protos with mising documentation
  """

  bestGuess = _messages.StringField(1)
  fromBytes = _messages.StringField(2)
  fromFileName = _messages.StringField(3)
  fromHeader = _messages.StringField(4)
  fromUrlPath = _messages.StringField(5)


class CreateAttachmentRequest(_messages.Message):
  r"""The request message for the CreateAttachment endpoint.

  Fields:
    attachment: Required. The attachment to be created.
  """

  attachment = _messages.MessageField('Attachment', 1)


class DiffChecksumsResponse(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    checksumsLocation: # gdata.* are outside protos with mising documentation
    chunkSizeBytes: # gdata.* are outside protos with mising documentation
    objectLocation: # gdata.* are outside protos with mising documentation
    objectSizeBytes: # gdata.* are outside protos with mising documentation
    objectVersion: # gdata.* are outside protos with mising documentation
  """

  checksumsLocation = _messages.MessageField('CompositeMedia', 1)
  chunkSizeBytes = _messages.IntegerField(2, variant=_messages.Variant.INT64)
  objectLocation = _messages.MessageField('CompositeMedia', 3)
  objectSizeBytes = _messages.IntegerField(4, variant=_messages.Variant.INT64)
  objectVersion = _messages.StringField(5)


class DiffDownloadResponse(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    objectLocation: # gdata.* are outside protos with mising documentation
  """

  objectLocation = _messages.MessageField('CompositeMedia', 1)


class DiffUploadRequest(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    checksumsInfo: # gdata.* are outside protos with mising documentation
    objectInfo: # gdata.* are outside protos with mising documentation
    objectVersion: # gdata.* are outside protos with mising documentation
  """

  checksumsInfo = _messages.MessageField('CompositeMedia', 1)
  objectInfo = _messages.MessageField('CompositeMedia', 2)
  objectVersion = _messages.StringField(3)


class DiffUploadResponse(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    objectVersion: # gdata.* are outside protos with mising documentation
    originalObject: # gdata.* are outside protos with mising documentation
  """

  objectVersion = _messages.StringField(1)
  originalObject = _messages.MessageField('CompositeMedia', 2)


class DiffVersionResponse(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    objectSizeBytes: # gdata.* are outside protos with mising documentation
    objectVersion: # gdata.* are outside protos with mising documentation
  """

  objectSizeBytes = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  objectVersion = _messages.StringField(2)


class DownloadParameters(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    allowGzipCompression: # gdata.* are outside protos with mising documentation
    ignoreRange: # gdata.* are outside protos with mising documentation
  """

  allowGzipCompression = _messages.BooleanField(1)
  ignoreRange = _messages.BooleanField(2)


class EscalateCaseRequest(_messages.Message):
  r"""The request message for the EscalateCase endpoint.

  Fields:
    escalation: The escalation object to be sent with the escalation request.
  """

  escalation = _messages.MessageField('Escalation', 1)


class Escalation(_messages.Message):
  r"""An escalation of a support case.

  Enums:
    ReasonValueValuesEnum: Required. The reason why the Case is being escalated.

  Fields:
    justification: Required. A free text description to accompany the `reason`
      field above. Provides additional context on why the case is being
      escalated.
    reason: Required. The reason why the Case is being escalated.
  """

  class ReasonValueValuesEnum(_messages.Enum):
    r"""Required. The reason why the Case is being escalated.

    Values:
      REASON_UNSPECIFIED: <no description>
      RESOLUTION_TIME: <no description>
      TECHNICAL_EXPERTISE: <no description>
      BUSINESS_IMPACT: <no description>
    """
    REASON_UNSPECIFIED = 0
    RESOLUTION_TIME = 1
    TECHNICAL_EXPERTISE = 2
    BUSINESS_IMPACT = 3

  justification = _messages.StringField(1)
  reason = _messages.EnumField('ReasonValueValuesEnum', 2)


class ListAttachmentsResponse(_messages.Message):
  r"""The response message for the ListAttachments endpoint.

  Fields:
    attachments: The list of attachments associated with the given case.
    nextPageToken: A token to retrieve the next page of results. This should be
      set in the `page_token` field of subsequent `cases.attachments.list`
      requests. If unspecified, there are no more results to retrieve.
  """

  attachments = _messages.MessageField('Attachment', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListCasesResponse(_messages.Message):
  r"""The response message for the ListCases endpoint.

  Fields:
    cases: The list of cases associated with the cloud resource, after any
      filters have been applied.
    nextPageToken: A token to retrieve the next page of results. This should be
      set in the `page_token` field of subsequent `ListCasesRequest` message
      that is issued. If unspecified, there are no more results to retrieve.
  """

  cases = _messages.MessageField('Case', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListCommentsResponse(_messages.Message):
  r"""The response message for the ListComments endpoint.

  Fields:
    comments: The list of Comments associated with the given Case.
    nextPageToken: A token to retrieve the next page of results. This should be
      set in the `page_token` field of subsequent `ListCommentsRequest` message
      that is issued. If unspecified, there are no more results to retrieve.
  """

  comments = _messages.MessageField('Comment', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class Media(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Enums:
    ReferenceTypeValueValuesEnum: # gdata.* are outside protos with mising
      documentation

  Fields:
    algorithm: # gdata.* are outside protos with mising documentation
    bigstoreObjectRef: # gdata.* are outside protos with mising documentation
    blobRef: # gdata.* are outside protos with mising documentation
    blobstore2Info: # gdata.* are outside protos with mising documentation
    compositeMedia: # gdata.* are outside protos with mising documentation
    contentType: # gdata.* are outside protos with mising documentation
    contentTypeInfo: # gdata.* are outside protos with mising documentation
    cosmoBinaryReference: # gdata.* are outside protos with mising documentation
    crc32cHash: # gdata.* are outside protos with mising documentation
    diffChecksumsResponse: # gdata.* are outside protos with mising
      documentation
    diffDownloadResponse: # gdata.* are outside protos with mising documentation
    diffUploadRequest: # gdata.* are outside protos with mising documentation
    diffUploadResponse: # gdata.* are outside protos with mising documentation
    diffVersionResponse: # gdata.* are outside protos with mising documentation
    downloadParameters: # gdata.* are outside protos with mising documentation
    filename: # gdata.* are outside protos with mising documentation
    hash: # gdata.* are outside protos with mising documentation
    hashVerified: # gdata.* are outside protos with mising documentation
    inline: # gdata.* are outside protos with mising documentation
    isPotentialRetry: # gdata.* are outside protos with mising documentation
    length: # gdata.* are outside protos with mising documentation
    md5Hash: # gdata.* are outside protos with mising documentation
    mediaId: # gdata.* are outside protos with mising documentation
    objectId: # gdata.* are outside protos with mising documentation
    path: # gdata.* are outside protos with mising documentation
    referenceType: # gdata.* are outside protos with mising documentation
    sha1Hash: # gdata.* are outside protos with mising documentation
    sha256Hash: # gdata.* are outside protos with mising documentation
    timestamp: # gdata.* are outside protos with mising documentation
    token: # gdata.* are outside protos with mising documentation
  """

  class ReferenceTypeValueValuesEnum(_messages.Enum):
    r"""# gdata.* are outside protos with mising documentation

    Values:
      PATH: <no description>
      BLOB_REF: <no description>
      INLINE: <no description>
      GET_MEDIA: <no description>
      COMPOSITE_MEDIA: <no description>
      BIGSTORE_REF: <no description>
      DIFF_VERSION_RESPONSE: <no description>
      DIFF_CHECKSUMS_RESPONSE: <no description>
      DIFF_DOWNLOAD_RESPONSE: <no description>
      DIFF_UPLOAD_REQUEST: <no description>
      DIFF_UPLOAD_RESPONSE: <no description>
      COSMO_BINARY_REFERENCE: <no description>
      ARBITRARY_BYTES: <no description>
    """
    PATH = 0
    BLOB_REF = 1
    INLINE = 2
    GET_MEDIA = 3
    COMPOSITE_MEDIA = 4
    BIGSTORE_REF = 5
    DIFF_VERSION_RESPONSE = 6
    DIFF_CHECKSUMS_RESPONSE = 7
    DIFF_DOWNLOAD_RESPONSE = 8
    DIFF_UPLOAD_REQUEST = 9
    DIFF_UPLOAD_RESPONSE = 10
    COSMO_BINARY_REFERENCE = 11
    ARBITRARY_BYTES = 12

  algorithm = _messages.StringField(1)
  bigstoreObjectRef = _messages.BytesField(2)
  blobRef = _messages.BytesField(3)
  blobstore2Info = _messages.MessageField('Blobstore2Info', 4)
  compositeMedia = _messages.MessageField('CompositeMedia', 5, repeated=True)
  contentType = _messages.StringField(6)
  contentTypeInfo = _messages.MessageField('ContentTypeInfo', 7)
  cosmoBinaryReference = _messages.BytesField(8)
  crc32cHash = _messages.IntegerField(9, variant=_messages.Variant.INT32)
  diffChecksumsResponse = _messages.MessageField('DiffChecksumsResponse', 10)
  diffDownloadResponse = _messages.MessageField('DiffDownloadResponse', 11)
  diffUploadRequest = _messages.MessageField('DiffUploadRequest', 12)
  diffUploadResponse = _messages.MessageField('DiffUploadResponse', 13)
  diffVersionResponse = _messages.MessageField('DiffVersionResponse', 14)
  downloadParameters = _messages.MessageField('DownloadParameters', 15)
  filename = _messages.StringField(16)
  hash = _messages.StringField(17)
  hashVerified = _messages.BooleanField(18)
  inline = _messages.BytesField(19)
  isPotentialRetry = _messages.BooleanField(20)
  length = _messages.IntegerField(21, variant=_messages.Variant.INT64)
  md5Hash = _messages.BytesField(22)
  mediaId = _messages.BytesField(23)
  objectId = _messages.MessageField('ObjectId', 24)
  path = _messages.StringField(25)
  referenceType = _messages.EnumField('ReferenceTypeValueValuesEnum', 26)
  sha1Hash = _messages.BytesField(27)
  sha256Hash = _messages.BytesField(28)
  timestamp = _messages.IntegerField(29, variant=_messages.Variant.INT64)
  token = _messages.StringField(30)


class ObjectId(_messages.Message):
  r"""# gdata.* are outside protos with mising documentation

  Fields:
    bucketName: # gdata.* are outside protos with mising documentation
    generation: # gdata.* are outside protos with mising documentation
    objectName: # gdata.* are outside protos with mising documentation
  """

  bucketName = _messages.StringField(1)
  generation = _messages.IntegerField(2, variant=_messages.Variant.INT64)
  objectName = _messages.StringField(3)


class SearchCaseClassificationsResponse(_messages.Message):
  r"""The response message for SearchCaseClassifications endpoint.

  Fields:
    caseClassifications: The classifications retrieved.
    nextPageToken: A token to retrieve the next page of results. This should be
      set in the `page_token` field of subsequent
      `SearchCaseClassificationsRequest` message that is issued. If unspecified,
      there are no more results to retrieve.
  """

  caseClassifications = _messages.MessageField('CaseClassification', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class SearchCasesResponse(_messages.Message):
  r"""The response message for the SearchCases endpoint.

  Fields:
    cases: The list of Case associated with the cloud resource, after any
      filters have been applied.
    nextPageToken: A token to retrieve the next page of results. This should be
      set in the `page_token` field of subsequent `SearchCaseRequest` message
      that is issued. If unspecified, there are no more results to retrieve.
  """

  cases = _messages.MessageField('Case', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class WorkflowOperationMetadata(_messages.Message):
  r"""Metadata about the operation. Used to lookup the current status.

  Enums:
    OperationActionValueValuesEnum: The type of action the operation is
      classified as.
    WorkflowOperationTypeValueValuesEnum: Which version of the workflow service
      this operation came from.

  Fields:
    namespace: The namespace that the job was scheduled in. Must be included in
      the workflow metadata so the workflow status can be retrieved.
    operationAction: The type of action the operation is classified as.
    workflowOperationType: Which version of the workflow service this operation
      came from.
  """

  class OperationActionValueValuesEnum(_messages.Enum):
    r"""The type of action the operation is classified as.

    Values:
      OPERATION_ACTION_UNSPECIFIED: <no description>
      CREATE_SUPPORT_ACCOUNT: <no description>
      UPDATE_SUPPORT_ACCOUNT: <no description>
      PURCHASE_SUPPORT_ACCOUNT: <no description>
    """
    OPERATION_ACTION_UNSPECIFIED = 0
    CREATE_SUPPORT_ACCOUNT = 1
    UPDATE_SUPPORT_ACCOUNT = 2
    PURCHASE_SUPPORT_ACCOUNT = 3

  class WorkflowOperationTypeValueValuesEnum(_messages.Enum):
    r"""Which version of the workflow service this operation came from.

    Values:
      UNKNOWN_OPERATION_TYPE: <no description>
      WORKFLOWS_V1: <no description>
      WORKFLOWS_V2: <no description>
    """
    UNKNOWN_OPERATION_TYPE = 0
    WORKFLOWS_V1 = 1
    WORKFLOWS_V2 = 2

  namespace = _messages.StringField(1)
  operationAction = _messages.EnumField('OperationActionValueValuesEnum', 2)
  workflowOperationType = _messages.EnumField('WorkflowOperationTypeValueValuesEnum', 3)
