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

r"""Generated message classes for adexchangebuyer2 version v2beta1."""
# NOTE: This file is autogenerated and should not be edited by hand.

from apitools.base.protorpclite import message_types as _message_types
from apitools.base.protorpclite import messages as _messages


package = 'adexchangebuyer2'


class AbsoluteDateRange(_messages.Message):
  r"""An absolute date range, specified by its start date and end date. The
  supported range of dates begins 30 days before today and ends today. Validity
  checked upon filter set creation. If a filter set with an absolute date range
  is run at a later date more than 30 days after start_date, it will fail.

  Fields:
    endDate: The end date of the range (inclusive). Must be within the 30 days
      leading up to current date, and must be equal to or after start_date.
    startDate: The start date of the range (inclusive). Must be within the 30
      days leading up to current date, and must be equal to or before end_date.
  """

  endDate = _message_types.DateTimeField(1)
  startDate = _message_types.DateTimeField(2)


class AcceptProposalRequest(_messages.Message):
  r"""Request to accept a proposal.

  Fields:
    proposalRevision: The last known client revision number of the proposal.
  """

  proposalRevision = _messages.IntegerField(1, variant=_messages.Variant.INT64)


class AdSize(_messages.Message):
  r"""Represents size of a single ad slot, or a creative.

  Enums:
    SizeTypeValueValuesEnum: The size type of the ad slot.

  Fields:
    height: The height of the ad slot in pixels. This field will be present only
      when size type is `PIXEL`.
    sizeType: The size type of the ad slot.
    width: The width of the ad slot in pixels. This field will be present only
      when size type is `PIXEL`.
  """

  class SizeTypeValueValuesEnum(_messages.Enum):
    r"""The size type of the ad slot.

    Values:
      SIZE_TYPE_UNSPECIFIED: <no description>
      PIXEL: <no description>
      INTERSTITIAL: <no description>
      NATIVE: <no description>
      FLUID: <no description>
    """
    SIZE_TYPE_UNSPECIFIED = 0
    PIXEL = 1
    INTERSTITIAL = 2
    NATIVE = 3
    FLUID = 4

  height = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  sizeType = _messages.EnumField('SizeTypeValueValuesEnum', 2)
  width = _messages.IntegerField(3, variant=_messages.Variant.INT64)


class AdTechnologyProviders(_messages.Message):
  r"""Detected ad technology provider information.

  Fields:
    detectedProviderIds: The detected ad technology provider IDs for this
      creative. See
      https://storage.googleapis.com/adx-rtb-dictionaries/providers.csv for
      mapping of provider ID to provided name, a privacy policy URL, and a list
      of domains which can be attributed to the provider. If the creative
      contains provider IDs that are outside of those listed in the
      `BidRequest.adslot.consented_providers_settings.consented_providers` field
      on the (Google bid
      protocol)[https://developers.google.com/authorized-buyers/rtb/downloads/realtime-bidding-proto]
      and the
      `BidRequest.user.ext.consented_providers_settings.consented_providers`
      field on the (OpenRTB
      protocol)[https://developers.google.com/authorized-buyers/rtb/downloads/openrtb-adx-proto],
      and a bid is submitted with that creative for an impression that will
      serve to an EEA user, the bid will be filtered before the auction.
    hasUnidentifiedProvider: Whether the creative contains an unidentified ad
      technology provider. If true for a given creative, any bid submitted with
      that creative for an impression that will serve to an EEA user will be
      filtered before the auction.
  """

  detectedProviderIds = _messages.IntegerField(1, variant=_messages.Variant.INT64, repeated=True)
  hasUnidentifiedProvider = _messages.BooleanField(2)


class AddDealAssociationRequest(_messages.Message):
  r"""A request for associating a deal and a creative.

  Fields:
    association: The association between a creative and a deal that should be
      added.
  """

  association = _messages.MessageField('CreativeDealAssociation', 1)


class AddNoteRequest(_messages.Message):
  r"""Request message for adding a note to a given proposal.

  Fields:
    note: Details of the note to add.
  """

  note = _messages.MessageField('Note', 1)


class AppContext(_messages.Message):
  r"""Output only. The app type the restriction applies to for mobile device.

  Enums:
    AppTypesValueListEntryValuesEnum: A AppTypesValueListEntryValuesEnum object.

  Fields:
    appTypes: The app types this restriction applies to.
  """

  class AppTypesValueListEntryValuesEnum(_messages.Enum):
    r"""A AppTypesValueListEntryValuesEnum object.

    Values:
      NATIVE: <no description>
      WEB: <no description>
    """
    NATIVE = 0
    WEB = 1

  appTypes = _messages.EnumField('AppTypesValueListEntryValuesEnum', 1, repeated=True)


class AuctionContext(_messages.Message):
  r"""Output only. The auction type the restriction applies to.

  Enums:
    AuctionTypesValueListEntryValuesEnum: A AuctionTypesValueListEntryValuesEnum
      object.

  Fields:
    auctionTypes: The auction types this restriction applies to.
  """

  class AuctionTypesValueListEntryValuesEnum(_messages.Enum):
    r"""A AuctionTypesValueListEntryValuesEnum object.

    Values:
      OPEN_AUCTION: <no description>
      DIRECT_DEALS: <no description>
    """
    OPEN_AUCTION = 0
    DIRECT_DEALS = 1

  auctionTypes = _messages.EnumField('AuctionTypesValueListEntryValuesEnum', 1, repeated=True)


class BidMetricsRow(_messages.Message):
  r"""The set of metrics that are measured in numbers of bids, representing how
  many bids with the specified dimension values were considered eligible at each
  stage of the bidding funnel;

  Fields:
    bids: The number of bids that Ad Exchange received from the buyer.
    bidsInAuction: The number of bids that were permitted to compete in the
      auction.
    billedImpressions: The number of bids for which the buyer was billed.
    impressionsWon: The number of bids that won the auction.
    measurableImpressions: The number of bids for which the corresponding
      impression was measurable for viewability (as defined by Active View).
    reachedQueries: The number of bids that won the auction and also won the
      mediation waterfall (if any).
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
    viewableImpressions: The number of bids for which the corresponding
      impression was viewable (as defined by Active View).
  """

  bids = _messages.MessageField('MetricValue', 1)
  bidsInAuction = _messages.MessageField('MetricValue', 2)
  billedImpressions = _messages.MessageField('MetricValue', 3)
  impressionsWon = _messages.MessageField('MetricValue', 4)
  measurableImpressions = _messages.MessageField('MetricValue', 5)
  reachedQueries = _messages.MessageField('MetricValue', 6)
  rowDimensions = _messages.MessageField('RowDimensions', 7)
  viewableImpressions = _messages.MessageField('MetricValue', 8)


class BidResponseWithoutBidsStatusRow(_messages.Message):
  r"""The number of impressions with the specified dimension values that were
  considered to have no applicable bids, as described by the specified status.

  Enums:
    StatusValueValuesEnum: The status specifying why the bid responses were
      considered to have no applicable bids.

  Fields:
    impressionCount: The number of impressions for which there was a bid
      response with the specified status.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
    status: The status specifying why the bid responses were considered to have
      no applicable bids.
  """

  class StatusValueValuesEnum(_messages.Enum):
    r"""The status specifying why the bid responses were considered to have no
    applicable bids.

    Values:
      STATUS_UNSPECIFIED: <no description>
      RESPONSES_WITHOUT_BIDS: <no description>
      RESPONSES_WITHOUT_BIDS_FOR_ACCOUNT: <no description>
      RESPONSES_WITHOUT_BIDS_FOR_DEAL: <no description>
    """
    STATUS_UNSPECIFIED = 0
    RESPONSES_WITHOUT_BIDS = 1
    RESPONSES_WITHOUT_BIDS_FOR_ACCOUNT = 2
    RESPONSES_WITHOUT_BIDS_FOR_DEAL = 3

  impressionCount = _messages.MessageField('MetricValue', 1)
  rowDimensions = _messages.MessageField('RowDimensions', 2)
  status = _messages.EnumField('StatusValueValuesEnum', 3)


class Buyer(_messages.Message):
  r"""Represents a buyer of inventory. Each buyer is identified by a unique
  Authorized Buyers account ID.

  Fields:
    accountId: Authorized Buyers account ID of the buyer.
  """

  accountId = _messages.StringField(1)


class CalloutStatusRow(_messages.Message):
  r"""The number of impressions with the specified dimension values where the
  corresponding bid request or bid response was not successful, as described by
  the specified callout status.

  Fields:
    calloutStatusId: The ID of the callout status. See
      [callout-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/callout-status-codes).
    impressionCount: The number of impressions for which there was a bid request
      or bid response with the specified callout status.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
  """

  calloutStatusId = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  impressionCount = _messages.MessageField('MetricValue', 2)
  rowDimensions = _messages.MessageField('RowDimensions', 3)


class CancelNegotiationRequest(_messages.Message):
  r"""Request to cancel an ongoing negotiation."""


class Client(_messages.Message):
  r"""A client resource represents a client buyeran agency, a brand, or an
  advertiser customer of the sponsor buyer. Users associated with the client
  buyer have restricted access to the Marketplace and certain other sections of
  the Authorized Buyers UI based on the role granted to the client buyer. All
  fields are required unless otherwise specified.

  Enums:
    EntityTypeValueValuesEnum: An optional field for specifying the type of the
      client entity: `ADVERTISER`, `BRAND`, or `AGENCY`.
    RoleValueValuesEnum: The role which is assigned to the client buyer. Each
      role implies a set of permissions granted to the client. Must be one of
      `CLIENT_DEAL_VIEWER`, `CLIENT_DEAL_NEGOTIATOR` or `CLIENT_DEAL_APPROVER`.
    StatusValueValuesEnum: The status of the client buyer.

  Fields:
    clientAccountId: The globally-unique numerical ID of the client. The value
      of this field is ignored in create and update operations.
    clientName: Name used to represent this client to publishers. You may have
      multiple clients that map to the same entity, but for each client the
      combination of `clientName` and entity must be unique. You can specify
      this field as empty. Maximum length of 255 characters is allowed.
    entityId: Numerical identifier of the client entity. The entity can be an
      advertiser, a brand, or an agency. This identifier is unique among all the
      entities with the same type. The value of this field is ignored if the
      entity type is not provided. A list of all known advertisers with their
      identifiers is available in the
      [advertisers.txt](https://storage.googleapis.com/adx-rtb-dictionaries/advertisers.txt)
      file. A list of all known brands with their identifiers is available in
      the
      [brands.txt](https://storage.googleapis.com/adx-rtb-dictionaries/brands.txt)
      file. A list of all known agencies with their identifiers is available in
      the
      [agencies.txt](https://storage.googleapis.com/adx-rtb-dictionaries/agencies.txt)
      file.
    entityName: The name of the entity. This field is automatically fetched
      based on the type and ID. The value of this field is ignored in create and
      update operations.
    entityType: An optional field for specifying the type of the client entity:
      `ADVERTISER`, `BRAND`, or `AGENCY`.
    partnerClientId: Optional arbitrary unique identifier of this client buyer
      from the standpoint of its Ad Exchange sponsor buyer. This field can be
      used to associate a client buyer with the identifier in the namespace of
      its sponsor buyer, lookup client buyers by that identifier and verify
      whether an Ad Exchange counterpart of a given client buyer already exists.
      If present, must be unique among all the client buyers for its Ad Exchange
      sponsor buyer.
    role: The role which is assigned to the client buyer. Each role implies a
      set of permissions granted to the client. Must be one of
      `CLIENT_DEAL_VIEWER`, `CLIENT_DEAL_NEGOTIATOR` or `CLIENT_DEAL_APPROVER`.
    status: The status of the client buyer.
    visibleToSeller: Whether the client buyer will be visible to sellers.
  """

  class EntityTypeValueValuesEnum(_messages.Enum):
    r"""An optional field for specifying the type of the client entity:
    `ADVERTISER`, `BRAND`, or `AGENCY`.

    Values:
      ENTITY_TYPE_UNSPECIFIED: <no description>
      ADVERTISER: <no description>
      BRAND: <no description>
      AGENCY: <no description>
      ENTITY_TYPE_UNCLASSIFIED: <no description>
    """
    ENTITY_TYPE_UNSPECIFIED = 0
    ADVERTISER = 1
    BRAND = 2
    AGENCY = 3
    ENTITY_TYPE_UNCLASSIFIED = 4

  class RoleValueValuesEnum(_messages.Enum):
    r"""The role which is assigned to the client buyer. Each role implies a set
    of permissions granted to the client. Must be one of `CLIENT_DEAL_VIEWER`,
    `CLIENT_DEAL_NEGOTIATOR` or `CLIENT_DEAL_APPROVER`.

    Values:
      CLIENT_ROLE_UNSPECIFIED: <no description>
      CLIENT_DEAL_VIEWER: <no description>
      CLIENT_DEAL_NEGOTIATOR: <no description>
      CLIENT_DEAL_APPROVER: <no description>
    """
    CLIENT_ROLE_UNSPECIFIED = 0
    CLIENT_DEAL_VIEWER = 1
    CLIENT_DEAL_NEGOTIATOR = 2
    CLIENT_DEAL_APPROVER = 3

  class StatusValueValuesEnum(_messages.Enum):
    r"""The status of the client buyer.

    Values:
      CLIENT_STATUS_UNSPECIFIED: <no description>
      DISABLED: <no description>
      ACTIVE: <no description>
    """
    CLIENT_STATUS_UNSPECIFIED = 0
    DISABLED = 1
    ACTIVE = 2

  clientAccountId = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  clientName = _messages.StringField(2)
  entityId = _messages.IntegerField(3, variant=_messages.Variant.INT64)
  entityName = _messages.StringField(4)
  entityType = _messages.EnumField('EntityTypeValueValuesEnum', 5)
  partnerClientId = _messages.StringField(6)
  role = _messages.EnumField('RoleValueValuesEnum', 7)
  status = _messages.EnumField('StatusValueValuesEnum', 8)
  visibleToSeller = _messages.BooleanField(9)


class ClientUser(_messages.Message):
  r"""A client user is created under a client buyer and has restricted access to
  the Marketplace and certain other sections of the Authorized Buyers UI based
  on the role granted to the associated client buyer. The only way a new client
  user can be created is through accepting an email invitation (see the
  accounts.clients.invitations.create method). All fields are required unless
  otherwise specified.

  Enums:
    StatusValueValuesEnum: The status of the client user.

  Fields:
    clientAccountId: Numerical account ID of the client buyer with which the
      user is associated; the buyer must be a client of the current sponsor
      buyer. The value of this field is ignored in an update operation.
    email: User's email address. The value of this field is ignored in an update
      operation.
    status: The status of the client user.
    userId: The unique numerical ID of the client user that has accepted an
      invitation. The value of this field is ignored in an update operation.
  """

  class StatusValueValuesEnum(_messages.Enum):
    r"""The status of the client user.

    Values:
      USER_STATUS_UNSPECIFIED: <no description>
      PENDING: <no description>
      ACTIVE: <no description>
      DISABLED: <no description>
    """
    USER_STATUS_UNSPECIFIED = 0
    PENDING = 1
    ACTIVE = 2
    DISABLED = 3

  clientAccountId = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  email = _messages.StringField(2)
  status = _messages.EnumField('StatusValueValuesEnum', 3)
  userId = _messages.IntegerField(4, variant=_messages.Variant.INT64)


class ClientUserInvitation(_messages.Message):
  r"""An invitation for a new client user to get access to the Authorized Buyers
  UI. All fields are required unless otherwise specified.

  Fields:
    clientAccountId: Numerical account ID of the client buyer that the invited
      user is associated with. The value of this field is ignored in create
      operations.
    email: The email address to which the invitation is sent. Email addresses
      should be unique among all client users under each sponsor buyer.
    invitationId: The unique numerical ID of the invitation that is sent to the
      user. The value of this field is ignored in create operations.
  """

  clientAccountId = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  email = _messages.StringField(2)
  invitationId = _messages.IntegerField(3, variant=_messages.Variant.INT64)


class CompleteSetupRequest(_messages.Message):
  r"""Request message for indicating that the proposal's setup step is complete.
  """


class ContactInformation(_messages.Message):
  r"""Contains information on how a buyer or seller can be reached.

  Fields:
    email: Email address for the contact.
    name: The name of the contact.
  """

  email = _messages.StringField(1)
  name = _messages.StringField(2)


class Correction(_messages.Message):
  r"""Output only. Shows any corrections that were applied to this creative.

  Enums:
    TypeValueValuesEnum: The type of correction that was applied to the
      creative.

  Fields:
    contexts: The contexts for the correction.
    details: Additional details about what was corrected.
    type: The type of correction that was applied to the creative.
  """

  class TypeValueValuesEnum(_messages.Enum):
    r"""The type of correction that was applied to the creative.

    Values:
      CORRECTION_TYPE_UNSPECIFIED: <no description>
      VENDOR_IDS_ADDED: <no description>
      SSL_ATTRIBUTE_REMOVED: <no description>
      FLASH_FREE_ATTRIBUTE_REMOVED: <no description>
      FLASH_FREE_ATTRIBUTE_ADDED: <no description>
      REQUIRED_ATTRIBUTE_ADDED: <no description>
      REQUIRED_VENDOR_ADDED: <no description>
      SSL_ATTRIBUTE_ADDED: <no description>
      IN_BANNER_VIDEO_ATTRIBUTE_ADDED: <no description>
      MRAID_ATTRIBUTE_ADDED: <no description>
      FLASH_ATTRIBUTE_REMOVED: <no description>
      VIDEO_IN_SNIPPET_ATTRIBUTE_ADDED: <no description>
    """
    CORRECTION_TYPE_UNSPECIFIED = 0
    VENDOR_IDS_ADDED = 1
    SSL_ATTRIBUTE_REMOVED = 2
    FLASH_FREE_ATTRIBUTE_REMOVED = 3
    FLASH_FREE_ATTRIBUTE_ADDED = 4
    REQUIRED_ATTRIBUTE_ADDED = 5
    REQUIRED_VENDOR_ADDED = 6
    SSL_ATTRIBUTE_ADDED = 7
    IN_BANNER_VIDEO_ATTRIBUTE_ADDED = 8
    MRAID_ATTRIBUTE_ADDED = 9
    FLASH_ATTRIBUTE_REMOVED = 10
    VIDEO_IN_SNIPPET_ATTRIBUTE_ADDED = 11

  contexts = _messages.MessageField('ServingContext', 1, repeated=True)
  details = _messages.StringField(2, repeated=True)
  type = _messages.EnumField('TypeValueValuesEnum', 3)


class Creative(_messages.Message):
  r"""A creative and its classification data.

  Enums:
    AttributesValueListEntryValuesEnum: A AttributesValueListEntryValuesEnum
      object.
    DealsStatusValueValuesEnum: Output only. The top-level deals status of this
      creative. If disapproved, an entry for 'auctionType=DIRECT_DEALS' (or
      'ALL') in serving_restrictions will also exist. Note that this may be
      nuanced with other contextual restrictions, in which case, it may be
      preferable to read from serving_restrictions directly. Can be used to
      filter the response of the creatives.list method.
    OpenAuctionStatusValueValuesEnum: Output only. The top-level open auction
      status of this creative. If disapproved, an entry for 'auctionType =
      OPEN_AUCTION' (or 'ALL') in serving_restrictions will also exist. Note
      that this may be nuanced with other contextual restrictions, in which
      case, it may be preferable to read from serving_restrictions directly. Can
      be used to filter the response of the creatives.list method.
    RestrictedCategoriesValueListEntryValuesEnum: A
      RestrictedCategoriesValueListEntryValuesEnum object.

  Fields:
    accountId: The account that this creative belongs to. Can be used to filter
      the response of the creatives.list method.
    adChoicesDestinationUrl: The link to AdChoices destination page.
    adTechnologyProviders: Output only. The detected ad technology providers.
    advertiserName: The name of the company being advertised in the creative.
    agencyId: The agency ID for this creative.
    apiUpdateTime: Output only. The last update timestamp of the creative
      through the API.
    attributes: All attributes for the ads that may be shown from this creative.
      Can be used to filter the response of the creatives.list method.
    clickThroughUrls: The set of destination URLs for the creative.
    corrections: Output only. Shows any corrections that were applied to this
      creative.
    creativeId: The buyer-defined creative ID of this creative. Can be used to
      filter the response of the creatives.list method.
    dealsStatus: Output only. The top-level deals status of this creative. If
      disapproved, an entry for 'auctionType=DIRECT_DEALS' (or 'ALL') in
      serving_restrictions will also exist. Note that this may be nuanced with
      other contextual restrictions, in which case, it may be preferable to read
      from serving_restrictions directly. Can be used to filter the response of
      the creatives.list method.
    declaredClickThroughUrls: The set of declared destination URLs for the
      creative.
    detectedAdvertiserIds: Output only. Detected advertiser IDs, if any.
    detectedDomains: Output only. The detected domains for this creative.
    detectedLanguages: Output only. The detected languages for this creative.
      The order is arbitrary. The codes are 2 or 5 characters and are documented
      at https://developers.google.com/adwords/api/docs/appendix/languagecodes.
    detectedProductCategories: Output only. Detected product categories, if any.
      See the ad-product-categories.txt file in the technical documentation for
      a list of IDs.
    detectedSensitiveCategories: Output only. Detected sensitive categories, if
      any. See the ad-sensitive-categories.txt file in the technical
      documentation for a list of IDs. You should use these IDs along with the
      excluded-sensitive-category field in the bid request to filter your bids.
    html: An HTML creative.
    impressionTrackingUrls: The set of URLs to be called to record an
      impression.
    native: A native creative.
    openAuctionStatus: Output only. The top-level open auction status of this
      creative. If disapproved, an entry for 'auctionType = OPEN_AUCTION' (or
      'ALL') in serving_restrictions will also exist. Note that this may be
      nuanced with other contextual restrictions, in which case, it may be
      preferable to read from serving_restrictions directly. Can be used to
      filter the response of the creatives.list method.
    restrictedCategories: All restricted categories for the ads that may be
      shown from this creative.
    servingRestrictions: Output only. The granular status of this ad in specific
      contexts. A context here relates to where something ultimately serves (for
      example, a physical location, a platform, an HTTPS versus HTTP request, or
      the type of auction).
    vendorIds: All vendor IDs for the ads that may be shown from this creative.
      See https://storage.googleapis.com/adx-rtb-dictionaries/vendors.txt for
      possible values.
    version: Output only. The version of this creative.
    video: A video creative.
  """

  class AttributesValueListEntryValuesEnum(_messages.Enum):
    r"""A AttributesValueListEntryValuesEnum object.

    Values:
      ATTRIBUTE_UNSPECIFIED: <no description>
      IMAGE_RICH_MEDIA: <no description>
      ADOBE_FLASH_FLV: <no description>
      IS_TAGGED: <no description>
      IS_COOKIE_TARGETED: <no description>
      IS_USER_INTEREST_TARGETED: <no description>
      EXPANDING_DIRECTION_NONE: <no description>
      EXPANDING_DIRECTION_UP: <no description>
      EXPANDING_DIRECTION_DOWN: <no description>
      EXPANDING_DIRECTION_LEFT: <no description>
      EXPANDING_DIRECTION_RIGHT: <no description>
      EXPANDING_DIRECTION_UP_LEFT: <no description>
      EXPANDING_DIRECTION_UP_RIGHT: <no description>
      EXPANDING_DIRECTION_DOWN_LEFT: <no description>
      EXPANDING_DIRECTION_DOWN_RIGHT: <no description>
      CREATIVE_TYPE_HTML: <no description>
      CREATIVE_TYPE_VAST_VIDEO: <no description>
      EXPANDING_DIRECTION_UP_OR_DOWN: <no description>
      EXPANDING_DIRECTION_LEFT_OR_RIGHT: <no description>
      EXPANDING_DIRECTION_ANY_DIAGONAL: <no description>
      EXPANDING_ACTION_ROLLOVER_TO_EXPAND: <no description>
      INSTREAM_VAST_VIDEO_TYPE_VPAID_FLASH: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_MRAID: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_FLASH: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_HTML5: <no description>
      SKIPPABLE_INSTREAM_VIDEO: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_SSL: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_NON_SSL: <no description>
      RICH_MEDIA_CAPABILITY_TYPE_INTERSTITIAL: <no description>
      NON_SKIPPABLE_INSTREAM_VIDEO: <no description>
      NATIVE_ELIGIBILITY_ELIGIBLE: <no description>
      NON_VPAID: <no description>
      NATIVE_ELIGIBILITY_NOT_ELIGIBLE: <no description>
      ANY_INTERSTITIAL: <no description>
      NON_INTERSTITIAL: <no description>
      IN_BANNER_VIDEO: <no description>
      RENDERING_SIZELESS_ADX: <no description>
      OMSDK_1_0: <no description>
    """
    ATTRIBUTE_UNSPECIFIED = 0
    IMAGE_RICH_MEDIA = 1
    ADOBE_FLASH_FLV = 2
    IS_TAGGED = 3
    IS_COOKIE_TARGETED = 4
    IS_USER_INTEREST_TARGETED = 5
    EXPANDING_DIRECTION_NONE = 6
    EXPANDING_DIRECTION_UP = 7
    EXPANDING_DIRECTION_DOWN = 8
    EXPANDING_DIRECTION_LEFT = 9
    EXPANDING_DIRECTION_RIGHT = 10
    EXPANDING_DIRECTION_UP_LEFT = 11
    EXPANDING_DIRECTION_UP_RIGHT = 12
    EXPANDING_DIRECTION_DOWN_LEFT = 13
    EXPANDING_DIRECTION_DOWN_RIGHT = 14
    CREATIVE_TYPE_HTML = 15
    CREATIVE_TYPE_VAST_VIDEO = 16
    EXPANDING_DIRECTION_UP_OR_DOWN = 17
    EXPANDING_DIRECTION_LEFT_OR_RIGHT = 18
    EXPANDING_DIRECTION_ANY_DIAGONAL = 19
    EXPANDING_ACTION_ROLLOVER_TO_EXPAND = 20
    INSTREAM_VAST_VIDEO_TYPE_VPAID_FLASH = 21
    RICH_MEDIA_CAPABILITY_TYPE_MRAID = 22
    RICH_MEDIA_CAPABILITY_TYPE_FLASH = 23
    RICH_MEDIA_CAPABILITY_TYPE_HTML5 = 24
    SKIPPABLE_INSTREAM_VIDEO = 25
    RICH_MEDIA_CAPABILITY_TYPE_SSL = 26
    RICH_MEDIA_CAPABILITY_TYPE_NON_SSL = 27
    RICH_MEDIA_CAPABILITY_TYPE_INTERSTITIAL = 28
    NON_SKIPPABLE_INSTREAM_VIDEO = 29
    NATIVE_ELIGIBILITY_ELIGIBLE = 30
    NON_VPAID = 31
    NATIVE_ELIGIBILITY_NOT_ELIGIBLE = 32
    ANY_INTERSTITIAL = 33
    NON_INTERSTITIAL = 34
    IN_BANNER_VIDEO = 35
    RENDERING_SIZELESS_ADX = 36
    OMSDK_1_0 = 37

  class DealsStatusValueValuesEnum(_messages.Enum):
    r"""Output only. The top-level deals status of this creative. If
    disapproved, an entry for 'auctionType=DIRECT_DEALS' (or 'ALL') in
    serving_restrictions will also exist. Note that this may be nuanced with
    other contextual restrictions, in which case, it may be preferable to read
    from serving_restrictions directly. Can be used to filter the response of
    the creatives.list method.

    Values:
      STATUS_UNSPECIFIED: <no description>
      NOT_CHECKED: <no description>
      CONDITIONALLY_APPROVED: <no description>
      APPROVED: <no description>
      DISAPPROVED: <no description>
      PENDING_REVIEW: <no description>
      STATUS_TYPE_UNSPECIFIED: <no description>
    """
    STATUS_UNSPECIFIED = 0
    NOT_CHECKED = 1
    CONDITIONALLY_APPROVED = 2
    APPROVED = 3
    DISAPPROVED = 4
    PENDING_REVIEW = 5
    STATUS_TYPE_UNSPECIFIED = 6

  class OpenAuctionStatusValueValuesEnum(_messages.Enum):
    r"""Output only. The top-level open auction status of this creative. If
    disapproved, an entry for 'auctionType = OPEN_AUCTION' (or 'ALL') in
    serving_restrictions will also exist. Note that this may be nuanced with
    other contextual restrictions, in which case, it may be preferable to read
    from serving_restrictions directly. Can be used to filter the response of
    the creatives.list method.

    Values:
      STATUS_UNSPECIFIED: <no description>
      NOT_CHECKED: <no description>
      CONDITIONALLY_APPROVED: <no description>
      APPROVED: <no description>
      DISAPPROVED: <no description>
      PENDING_REVIEW: <no description>
      STATUS_TYPE_UNSPECIFIED: <no description>
    """
    STATUS_UNSPECIFIED = 0
    NOT_CHECKED = 1
    CONDITIONALLY_APPROVED = 2
    APPROVED = 3
    DISAPPROVED = 4
    PENDING_REVIEW = 5
    STATUS_TYPE_UNSPECIFIED = 6

  class RestrictedCategoriesValueListEntryValuesEnum(_messages.Enum):
    r"""A RestrictedCategoriesValueListEntryValuesEnum object.

    Values:
      NO_RESTRICTED_CATEGORIES: <no description>
      ALCOHOL: <no description>
    """
    NO_RESTRICTED_CATEGORIES = 0
    ALCOHOL = 1

  accountId = _messages.StringField(1)
  adChoicesDestinationUrl = _messages.StringField(2)
  adTechnologyProviders = _messages.MessageField('AdTechnologyProviders', 3)
  advertiserName = _messages.StringField(4)
  agencyId = _messages.IntegerField(5, variant=_messages.Variant.INT64)
  apiUpdateTime = _message_types.DateTimeField(6)
  attributes = _messages.EnumField('AttributesValueListEntryValuesEnum', 7, repeated=True)
  clickThroughUrls = _messages.StringField(8, repeated=True)
  corrections = _messages.MessageField('Correction', 9, repeated=True)
  creativeId = _messages.StringField(10)
  dealsStatus = _messages.EnumField('DealsStatusValueValuesEnum', 11)
  declaredClickThroughUrls = _messages.StringField(12, repeated=True)
  detectedAdvertiserIds = _messages.IntegerField(13, variant=_messages.Variant.INT64, repeated=True)
  detectedDomains = _messages.StringField(14, repeated=True)
  detectedLanguages = _messages.StringField(15, repeated=True)
  detectedProductCategories = _messages.IntegerField(16, variant=_messages.Variant.INT32, repeated=True)
  detectedSensitiveCategories = _messages.IntegerField(17, variant=_messages.Variant.INT32, repeated=True)
  html = _messages.MessageField('HtmlContent', 18)
  impressionTrackingUrls = _messages.StringField(19, repeated=True)
  native = _messages.MessageField('NativeContent', 20)
  openAuctionStatus = _messages.EnumField('OpenAuctionStatusValueValuesEnum', 21)
  restrictedCategories = _messages.EnumField('RestrictedCategoriesValueListEntryValuesEnum', 22, repeated=True)
  servingRestrictions = _messages.MessageField('ServingRestriction', 23, repeated=True)
  vendorIds = _messages.IntegerField(24, variant=_messages.Variant.INT32, repeated=True)
  version = _messages.IntegerField(25, variant=_messages.Variant.INT32)
  video = _messages.MessageField('VideoContent', 26)


class CreativeDealAssociation(_messages.Message):
  r"""The association between a creative and a deal.

  Fields:
    accountId: The account the creative belongs to.
    creativeId: The ID of the creative associated with the deal.
    dealsId: The externalDealId for the deal associated with the creative.
  """

  accountId = _messages.StringField(1)
  creativeId = _messages.StringField(2)
  dealsId = _messages.StringField(3)


class CreativeRestrictions(_messages.Message):
  r"""Represents creative restrictions associated to Programmatic Guaranteed/
  Preferred Deal in Ad Manager. This doesn't apply to Private Auction and AdX
  Preferred Deals.

  Enums:
    CreativeFormatValueValuesEnum: The format of the environment that the
      creatives will be displayed in.
    SkippableAdTypeValueValuesEnum: Skippable video ads allow viewers to skip
      ads after 5 seconds.

  Fields:
    creativeFormat: The format of the environment that the creatives will be
      displayed in.
    creativeSpecifications: A CreativeSpecification attribute.
    skippableAdType: Skippable video ads allow viewers to skip ads after 5
      seconds.
  """

  class CreativeFormatValueValuesEnum(_messages.Enum):
    r"""The format of the environment that the creatives will be displayed in.

    Values:
      CREATIVE_FORMAT_UNSPECIFIED: <no description>
      DISPLAY: <no description>
      VIDEO: <no description>
    """
    CREATIVE_FORMAT_UNSPECIFIED = 0
    DISPLAY = 1
    VIDEO = 2

  class SkippableAdTypeValueValuesEnum(_messages.Enum):
    r"""Skippable video ads allow viewers to skip ads after 5 seconds.

    Values:
      SKIPPABLE_AD_TYPE_UNSPECIFIED: <no description>
      SKIPPABLE: <no description>
      INSTREAM_SELECT: <no description>
      NOT_SKIPPABLE: <no description>
    """
    SKIPPABLE_AD_TYPE_UNSPECIFIED = 0
    SKIPPABLE = 1
    INSTREAM_SELECT = 2
    NOT_SKIPPABLE = 3

  creativeFormat = _messages.EnumField('CreativeFormatValueValuesEnum', 1)
  creativeSpecifications = _messages.MessageField('CreativeSpecification', 2, repeated=True)
  skippableAdType = _messages.EnumField('SkippableAdTypeValueValuesEnum', 3)


class CreativeSize(_messages.Message):
  r"""Specifies the size of the creative.

  Enums:
    AllowedFormatsValueListEntryValuesEnum: A
      AllowedFormatsValueListEntryValuesEnum object.
    CreativeSizeTypeValueValuesEnum: The creative size type.
    NativeTemplateValueValuesEnum: Output only. The native template for this
      creative. It will have a value only if creative_size_type =
      CreativeSizeType.NATIVE.
    SkippableAdTypeValueValuesEnum: The type of skippable ad for this creative.
      It will have a value only if creative_size_type = CreativeSizeType.VIDEO.

  Fields:
    allowedFormats: What formats are allowed by the publisher. If this repeated
      field is empty then all formats are allowed. For example, if this field
      contains AllowedFormatType.AUDIO then the publisher only allows an audio
      ad (without any video).
    companionSizes: For video creatives specifies the sizes of companion ads (if
      present). Companion sizes may be filled in only when creative_size_type =
      VIDEO
    creativeSizeType: The creative size type.
    nativeTemplate: Output only. The native template for this creative. It will
      have a value only if creative_size_type = CreativeSizeType.NATIVE.
    size: For regular or video creative size type, specifies the size of the
      creative
    skippableAdType: The type of skippable ad for this creative. It will have a
      value only if creative_size_type = CreativeSizeType.VIDEO.
  """

  class AllowedFormatsValueListEntryValuesEnum(_messages.Enum):
    r"""A AllowedFormatsValueListEntryValuesEnum object.

    Values:
      UNKNOWN: <no description>
      AUDIO: <no description>
    """
    UNKNOWN = 0
    AUDIO = 1

  class CreativeSizeTypeValueValuesEnum(_messages.Enum):
    r"""The creative size type.

    Values:
      CREATIVE_SIZE_TYPE_UNSPECIFIED: <no description>
      REGULAR: <no description>
      INTERSTITIAL: <no description>
      VIDEO: <no description>
      NATIVE: <no description>
    """
    CREATIVE_SIZE_TYPE_UNSPECIFIED = 0
    REGULAR = 1
    INTERSTITIAL = 2
    VIDEO = 3
    NATIVE = 4

  class NativeTemplateValueValuesEnum(_messages.Enum):
    r"""Output only. The native template for this creative. It will have a value
    only if creative_size_type = CreativeSizeType.NATIVE.

    Values:
      UNKNOWN_NATIVE_TEMPLATE: <no description>
      NATIVE_CONTENT_AD: <no description>
      NATIVE_APP_INSTALL_AD: <no description>
      NATIVE_VIDEO_CONTENT_AD: <no description>
      NATIVE_VIDEO_APP_INSTALL_AD: <no description>
    """
    UNKNOWN_NATIVE_TEMPLATE = 0
    NATIVE_CONTENT_AD = 1
    NATIVE_APP_INSTALL_AD = 2
    NATIVE_VIDEO_CONTENT_AD = 3
    NATIVE_VIDEO_APP_INSTALL_AD = 4

  class SkippableAdTypeValueValuesEnum(_messages.Enum):
    r"""The type of skippable ad for this creative. It will have a value only if
    creative_size_type = CreativeSizeType.VIDEO.

    Values:
      SKIPPABLE_AD_TYPE_UNSPECIFIED: <no description>
      GENERIC: <no description>
      INSTREAM_SELECT: <no description>
      NOT_SKIPPABLE: <no description>
    """
    SKIPPABLE_AD_TYPE_UNSPECIFIED = 0
    GENERIC = 1
    INSTREAM_SELECT = 2
    NOT_SKIPPABLE = 3

  allowedFormats = _messages.EnumField('AllowedFormatsValueListEntryValuesEnum', 1, repeated=True)
  companionSizes = _messages.MessageField('Size', 2, repeated=True)
  creativeSizeType = _messages.EnumField('CreativeSizeTypeValueValuesEnum', 3)
  nativeTemplate = _messages.EnumField('NativeTemplateValueValuesEnum', 4)
  size = _messages.MessageField('Size', 5)
  skippableAdType = _messages.EnumField('SkippableAdTypeValueValuesEnum', 6)


class CreativeSpecification(_messages.Message):
  r"""Represents information for a creative that is associated with a
  Programmatic Guaranteed/Preferred Deal in Ad Manager.

  Fields:
    creativeCompanionSizes: Companion sizes may be filled in only when this is a
      video creative.
    creativeSize: The size of the creative.
  """

  creativeCompanionSizes = _messages.MessageField('AdSize', 1, repeated=True)
  creativeSize = _messages.MessageField('AdSize', 2)


class CreativeStatusRow(_messages.Message):
  r"""The number of bids with the specified dimension values that did not win
  the auction (either were filtered pre-auction or lost the auction), as
  described by the specified creative status.

  Fields:
    bidCount: The number of bids with the specified status.
    creativeStatusId: The ID of the creative status. See
      [creative-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/creative-status-codes).
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
  """

  bidCount = _messages.MessageField('MetricValue', 1)
  creativeStatusId = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  rowDimensions = _messages.MessageField('RowDimensions', 3)


class CriteriaTargeting(_messages.Message):
  r"""Generic targeting used for targeting dimensions that contains a list of
  included and excluded numeric IDs.

  Fields:
    excludedCriteriaIds: A list of numeric IDs to be excluded.
    targetedCriteriaIds: A list of numeric IDs to be included.
  """

  excludedCriteriaIds = _messages.IntegerField(1, variant=_messages.Variant.INT64, repeated=True)
  targetedCriteriaIds = _messages.IntegerField(2, variant=_messages.Variant.INT64, repeated=True)


class Date(_messages.Message):
  r"""Represents a whole or partial calendar date, such as a birthday. The time
  of day and time zone are either specified elsewhere or are insignificant. The
  date is relative to the Gregorian Calendar. This can represent one of the
  following: * A full date, with non-zero year, month, and day values. * A month
  and day, with a zero year (for example, an anniversary). * A year on its own,
  with a zero month and a zero day. * A year and month, with a zero day (for
  example, a credit card expiration date). Related types: *
  google.type.TimeOfDay * google.type.DateTime * google.protobuf.Timestamp

  Fields:
    day: Day of a month. Must be from 1 to 31 and valid for the year and month,
      or 0 to specify a year by itself or a year and month where the day isn't
      significant.
    month: Month of a year. Must be from 1 to 12, or 0 to specify a year without
      a month and day.
    year: Year of the date. Must be from 1 to 9999, or 0 to specify a date
      without a year.
  """

  day = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  month = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  year = _messages.IntegerField(3, variant=_messages.Variant.INT32)


class DayPart(_messages.Message):
  r"""Daypart targeting message that specifies if the ad can be shown only
  during certain parts of a day/week.

  Enums:
    DayOfWeekValueValuesEnum: The day of the week to target. If unspecified,
      applicable to all days.

  Fields:
    dayOfWeek: The day of the week to target. If unspecified, applicable to all
      days.
    endTime: The ending time of the day for the ad to show (minute level
      granularity). The end time is exclusive. This field is not available for
      filtering in PQL queries.
    startTime: The starting time of day for the ad to show (minute level
      granularity). The start time is inclusive. This field is not available for
      filtering in PQL queries.
  """

  class DayOfWeekValueValuesEnum(_messages.Enum):
    r"""The day of the week to target. If unspecified, applicable to all days.

    Values:
      DAY_OF_WEEK_UNSPECIFIED: <no description>
      MONDAY: <no description>
      TUESDAY: <no description>
      WEDNESDAY: <no description>
      THURSDAY: <no description>
      FRIDAY: <no description>
      SATURDAY: <no description>
      SUNDAY: <no description>
    """
    DAY_OF_WEEK_UNSPECIFIED = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

  dayOfWeek = _messages.EnumField('DayOfWeekValueValuesEnum', 1)
  endTime = _messages.MessageField('TimeOfDay', 2)
  startTime = _messages.MessageField('TimeOfDay', 3)


class DayPartTargeting(_messages.Message):
  r"""Specifies the day part targeting criteria.

  Enums:
    TimeZoneTypeValueValuesEnum: The timezone to use for interpreting the day
      part targeting.

  Fields:
    dayParts: A list of day part targeting criterion.
    timeZoneType: The timezone to use for interpreting the day part targeting.
  """

  class TimeZoneTypeValueValuesEnum(_messages.Enum):
    r"""The timezone to use for interpreting the day part targeting.

    Values:
      TIME_ZONE_SOURCE_UNSPECIFIED: <no description>
      PUBLISHER: <no description>
      USER: <no description>
    """
    TIME_ZONE_SOURCE_UNSPECIFIED = 0
    PUBLISHER = 1
    USER = 2

  dayParts = _messages.MessageField('DayPart', 1, repeated=True)
  timeZoneType = _messages.EnumField('TimeZoneTypeValueValuesEnum', 2)


class Deal(_messages.Message):
  r"""A deal represents a segment of inventory for displaying ads on. A proposal
  can contain multiple deals. A deal contains the terms and targeting
  information that is used for serving.

  Enums:
    CreativePreApprovalPolicyValueValuesEnum: Output only. Specifies the
      creative pre-approval policy.
    CreativeSafeFrameCompatibilityValueValuesEnum: Output only. Specifies
      whether the creative is safeFrame compatible.
    ProgrammaticCreativeSourceValueValuesEnum: Output only. Specifies the
      creative source for programmatic deals. PUBLISHER means creative is
      provided by seller and ADVERTISER means creative is provided by buyer.
    SyndicationProductValueValuesEnum: The syndication product associated with
      the deal. Note: This field may be set only when creating the resource.
      Modifying this field while updating the resource will result in an error.

  Fields:
    availableEndTime: Proposed flight end time of the deal. This will generally
      be stored in a granularity of a second. A value is not required for
      Private Auction deals or Preferred Deals.
    availableStartTime: Optional. Proposed flight start time of the deal. This
      will generally be stored in the granularity of one second since deal
      serving starts at seconds boundary. Any time specified with more
      granularity (for example, in milliseconds) will be truncated towards the
      start of time in seconds.
    buyerPrivateData: Buyer private data (hidden from seller).
    createProductId: The product ID from which this deal was created. Note: This
      field may be set only when creating the resource. Modifying this field
      while updating the resource will result in an error.
    createProductRevision: Optional. Revision number of the product that the
      deal was created from. If present on create, and the server
      `product_revision` has advanced since the passed-in
      `create_product_revision`, an `ABORTED` error will be returned. Note: This
      field may be set only when creating the resource. Modifying this field
      while updating the resource will result in an error.
    createTime: Output only. The time of the deal creation.
    creativePreApprovalPolicy: Output only. Specifies the creative pre-approval
      policy.
    creativeRestrictions: Output only. Restricitions about the creatives
      associated with the deal (for example, size) This is available for
      Programmatic Guaranteed/Preferred Deals in Ad Manager.
    creativeSafeFrameCompatibility: Output only. Specifies whether the creative
      is safeFrame compatible.
    dealId: Output only. A unique deal ID for the deal (server-assigned).
    dealServingMetadata: Output only. Metadata about the serving status of this
      deal.
    dealTerms: The negotiable terms of the deal.
    deliveryControl: The set of fields around delivery control that are
      interesting for a buyer to see but are non-negotiable. These are set by
      the publisher.
    description: Description for the deal terms.
    displayName: The name of the deal.
    externalDealId: Output only. The external deal ID assigned to this deal once
      the deal is finalized. This is the deal ID that shows up in
      serving/reporting etc.
    isSetupComplete: Output only. True, if the buyside inventory setup is
      complete for this deal.
    programmaticCreativeSource: Output only. Specifies the creative source for
      programmatic deals. PUBLISHER means creative is provided by seller and
      ADVERTISER means creative is provided by buyer.
    proposalId: Output only. ID of the proposal that this deal is part of.
    sellerContacts: Output only. Seller contact information for the deal.
    syndicationProduct: The syndication product associated with the deal. Note:
      This field may be set only when creating the resource. Modifying this
      field while updating the resource will result in an error.
    targeting: Output only. Specifies the subset of inventory targeted by the
      deal.
    targetingCriterion: The shared targeting visible to buyers and sellers. Each
      shared targeting entity is AND'd together.
    updateTime: Output only. The time when the deal was last updated.
    webPropertyCode: The web property code for the seller copied over from the
      product.
  """

  class CreativePreApprovalPolicyValueValuesEnum(_messages.Enum):
    r"""Output only. Specifies the creative pre-approval policy.

    Values:
      CREATIVE_PRE_APPROVAL_POLICY_UNSPECIFIED: <no description>
      SELLER_PRE_APPROVAL_REQUIRED: <no description>
      SELLER_PRE_APPROVAL_NOT_REQUIRED: <no description>
    """
    CREATIVE_PRE_APPROVAL_POLICY_UNSPECIFIED = 0
    SELLER_PRE_APPROVAL_REQUIRED = 1
    SELLER_PRE_APPROVAL_NOT_REQUIRED = 2

  class CreativeSafeFrameCompatibilityValueValuesEnum(_messages.Enum):
    r"""Output only. Specifies whether the creative is safeFrame compatible.

    Values:
      CREATIVE_SAFE_FRAME_COMPATIBILITY_UNSPECIFIED: <no description>
      COMPATIBLE: <no description>
      INCOMPATIBLE: <no description>
    """
    CREATIVE_SAFE_FRAME_COMPATIBILITY_UNSPECIFIED = 0
    COMPATIBLE = 1
    INCOMPATIBLE = 2

  class ProgrammaticCreativeSourceValueValuesEnum(_messages.Enum):
    r"""Output only. Specifies the creative source for programmatic deals.
    PUBLISHER means creative is provided by seller and ADVERTISER means creative
    is provided by buyer.

    Values:
      PROGRAMMATIC_CREATIVE_SOURCE_UNSPECIFIED: <no description>
      ADVERTISER: <no description>
      PUBLISHER: <no description>
    """
    PROGRAMMATIC_CREATIVE_SOURCE_UNSPECIFIED = 0
    ADVERTISER = 1
    PUBLISHER = 2

  class SyndicationProductValueValuesEnum(_messages.Enum):
    r"""The syndication product associated with the deal. Note: This field may
    be set only when creating the resource. Modifying this field while updating
    the resource will result in an error.

    Values:
      SYNDICATION_PRODUCT_UNSPECIFIED: <no description>
      CONTENT: <no description>
      MOBILE: <no description>
      VIDEO: <no description>
      GAMES: <no description>
    """
    SYNDICATION_PRODUCT_UNSPECIFIED = 0
    CONTENT = 1
    MOBILE = 2
    VIDEO = 3
    GAMES = 4

  availableEndTime = _message_types.DateTimeField(1)
  availableStartTime = _message_types.DateTimeField(2)
  buyerPrivateData = _messages.MessageField('PrivateData', 3)
  createProductId = _messages.StringField(4)
  createProductRevision = _messages.IntegerField(5, variant=_messages.Variant.INT64)
  createTime = _message_types.DateTimeField(6)
  creativePreApprovalPolicy = _messages.EnumField('CreativePreApprovalPolicyValueValuesEnum', 7)
  creativeRestrictions = _messages.MessageField('CreativeRestrictions', 8)
  creativeSafeFrameCompatibility = _messages.EnumField('CreativeSafeFrameCompatibilityValueValuesEnum', 9)
  dealId = _messages.StringField(10)
  dealServingMetadata = _messages.MessageField('DealServingMetadata', 11)
  dealTerms = _messages.MessageField('DealTerms', 12)
  deliveryControl = _messages.MessageField('DeliveryControl', 13)
  description = _messages.StringField(14)
  displayName = _messages.StringField(15)
  externalDealId = _messages.StringField(16)
  isSetupComplete = _messages.BooleanField(17)
  programmaticCreativeSource = _messages.EnumField('ProgrammaticCreativeSourceValueValuesEnum', 18)
  proposalId = _messages.StringField(19)
  sellerContacts = _messages.MessageField('ContactInformation', 20, repeated=True)
  syndicationProduct = _messages.EnumField('SyndicationProductValueValuesEnum', 21)
  targeting = _messages.MessageField('MarketplaceTargeting', 22)
  targetingCriterion = _messages.MessageField('TargetingCriteria', 23, repeated=True)
  updateTime = _message_types.DateTimeField(24)
  webPropertyCode = _messages.StringField(25)


class DealPauseStatus(_messages.Message):
  r"""Tracks which parties (if any) have paused a deal. The deal is considered
  paused if either hasBuyerPaused or hasSellPaused is true.

  Enums:
    FirstPausedByValueValuesEnum: The role of the person who first paused this
      deal.

  Fields:
    buyerPauseReason: The buyer's reason for pausing, if the buyer paused the
      deal.
    firstPausedBy: The role of the person who first paused this deal.
    hasBuyerPaused: True, if the buyer has paused the deal unilaterally.
    hasSellerPaused: True, if the seller has paused the deal unilaterally.
    sellerPauseReason: The seller's reason for pausing, if the seller paused the
      deal.
  """

  class FirstPausedByValueValuesEnum(_messages.Enum):
    r"""The role of the person who first paused this deal.

    Values:
      BUYER_SELLER_ROLE_UNSPECIFIED: <no description>
      BUYER: <no description>
      SELLER: <no description>
    """
    BUYER_SELLER_ROLE_UNSPECIFIED = 0
    BUYER = 1
    SELLER = 2

  buyerPauseReason = _messages.StringField(1)
  firstPausedBy = _messages.EnumField('FirstPausedByValueValuesEnum', 2)
  hasBuyerPaused = _messages.BooleanField(3)
  hasSellerPaused = _messages.BooleanField(4)
  sellerPauseReason = _messages.StringField(5)


class DealServingMetadata(_messages.Message):
  r"""Message captures metadata about the serving status of a deal.

  Fields:
    dealPauseStatus: Output only. Tracks which parties (if any) have paused a
      deal.
  """

  dealPauseStatus = _messages.MessageField('DealPauseStatus', 1)


class DealTerms(_messages.Message):
  r"""The deal terms specify the details of a Product/deal. They specify things
  like price per buyer, the type of pricing model (for example, fixed price,
  auction) and expected impressions from the publisher.

  Enums:
    BrandingTypeValueValuesEnum: Visibility of the URL in bid requests.
      (default: BRANDED)

  Fields:
    brandingType: Visibility of the URL in bid requests. (default: BRANDED)
    description: Publisher provided description for the terms.
    estimatedGrossSpend: Non-binding estimate of the estimated gross spend for
      this deal. Can be set by buyer or seller.
    estimatedImpressionsPerDay: Non-binding estimate of the impressions served
      per day. Can be set by buyer or seller.
    guaranteedFixedPriceTerms: The terms for guaranteed fixed price deals.
    nonGuaranteedAuctionTerms: The terms for non-guaranteed auction deals.
    nonGuaranteedFixedPriceTerms: The terms for non-guaranteed fixed price
      deals.
    sellerTimeZone: The time zone name. For deals with Cost Per Day billing,
      defines the time zone used to mark the boundaries of a day. It should be
      an IANA TZ name, such as "America/Los_Angeles". For more information, see
      https://en.wikipedia.org/wiki/List_of_tz_database_time_zones.
  """

  class BrandingTypeValueValuesEnum(_messages.Enum):
    r"""Visibility of the URL in bid requests. (default: BRANDED)

    Values:
      BRANDING_TYPE_UNSPECIFIED: <no description>
      BRANDED: <no description>
      SEMI_TRANSPARENT: <no description>
    """
    BRANDING_TYPE_UNSPECIFIED = 0
    BRANDED = 1
    SEMI_TRANSPARENT = 2

  brandingType = _messages.EnumField('BrandingTypeValueValuesEnum', 1)
  description = _messages.StringField(2)
  estimatedGrossSpend = _messages.MessageField('Price', 3)
  estimatedImpressionsPerDay = _messages.IntegerField(4, variant=_messages.Variant.INT64)
  guaranteedFixedPriceTerms = _messages.MessageField('GuaranteedFixedPriceTerms', 5)
  nonGuaranteedAuctionTerms = _messages.MessageField('NonGuaranteedAuctionTerms', 6)
  nonGuaranteedFixedPriceTerms = _messages.MessageField('NonGuaranteedFixedPriceTerms', 7)
  sellerTimeZone = _messages.StringField(8)


class DeliveryControl(_messages.Message):
  r"""Message contains details about how the deals will be paced.

  Enums:
    CreativeBlockingLevelValueValuesEnum: Output only. Specified the creative
      blocking levels to be applied.
    DeliveryRateTypeValueValuesEnum: Output only. Specifies how the impression
      delivery will be paced.

  Fields:
    creativeBlockingLevel: Output only. Specified the creative blocking levels
      to be applied.
    deliveryRateType: Output only. Specifies how the impression delivery will be
      paced.
    frequencyCaps: Output only. Specifies any frequency caps.
  """

  class CreativeBlockingLevelValueValuesEnum(_messages.Enum):
    r"""Output only. Specified the creative blocking levels to be applied.

    Values:
      CREATIVE_BLOCKING_LEVEL_UNSPECIFIED: <no description>
      PUBLISHER_BLOCKING_RULES: <no description>
      ADX_POLICY_BLOCKING_ONLY: <no description>
    """
    CREATIVE_BLOCKING_LEVEL_UNSPECIFIED = 0
    PUBLISHER_BLOCKING_RULES = 1
    ADX_POLICY_BLOCKING_ONLY = 2

  class DeliveryRateTypeValueValuesEnum(_messages.Enum):
    r"""Output only. Specifies how the impression delivery will be paced.

    Values:
      DELIVERY_RATE_TYPE_UNSPECIFIED: <no description>
      EVENLY: <no description>
      FRONT_LOADED: <no description>
      AS_FAST_AS_POSSIBLE: <no description>
    """
    DELIVERY_RATE_TYPE_UNSPECIFIED = 0
    EVENLY = 1
    FRONT_LOADED = 2
    AS_FAST_AS_POSSIBLE = 3

  creativeBlockingLevel = _messages.EnumField('CreativeBlockingLevelValueValuesEnum', 1)
  deliveryRateType = _messages.EnumField('DeliveryRateTypeValueValuesEnum', 2)
  frequencyCaps = _messages.MessageField('FrequencyCap', 3, repeated=True)


class Disapproval(_messages.Message):
  r"""Output only. The reason and details for a disapproval.

  Enums:
    ReasonValueValuesEnum: The categorized reason for disapproval.

  Fields:
    details: Additional details about the reason for disapproval.
    reason: The categorized reason for disapproval.
  """

  class ReasonValueValuesEnum(_messages.Enum):
    r"""The categorized reason for disapproval.

    Values:
      LENGTH_OF_IMAGE_ANIMATION: <no description>
      BROKEN_URL: <no description>
      MEDIA_NOT_FUNCTIONAL: <no description>
      INVALID_FOURTH_PARTY_CALL: <no description>
      INCORRECT_REMARKETING_DECLARATION: <no description>
      LANDING_PAGE_ERROR: <no description>
      AD_SIZE_DOES_NOT_MATCH_AD_SLOT: <no description>
      NO_BORDER: <no description>
      FOURTH_PARTY_BROWSER_COOKIES: <no description>
      LSO_OBJECTS: <no description>
      BLANK_CREATIVE: <no description>
      DESTINATION_URLS_UNDECLARED: <no description>
      PROBLEM_WITH_CLICK_MACRO: <no description>
      INCORRECT_AD_TECHNOLOGY_DECLARATION: <no description>
      INCORRECT_DESTINATION_URL_DECLARATION: <no description>
      EXPANDABLE_INCORRECT_DIRECTION: <no description>
      EXPANDABLE_DIRECTION_NOT_SUPPORTED: <no description>
      EXPANDABLE_INVALID_VENDOR: <no description>
      EXPANDABLE_FUNCTIONALITY: <no description>
      VIDEO_INVALID_VENDOR: <no description>
      VIDEO_UNSUPPORTED_LENGTH: <no description>
      VIDEO_UNSUPPORTED_FORMAT: <no description>
      VIDEO_FUNCTIONALITY: <no description>
      LANDING_PAGE_DISABLED: <no description>
      MALWARE_SUSPECTED: <no description>
      ADULT_IMAGE_OR_VIDEO: <no description>
      INACCURATE_AD_TEXT: <no description>
      COUNTERFEIT_DESIGNER_GOODS: <no description>
      POP_UP: <no description>
      INVALID_RTB_PROTOCOL_USAGE: <no description>
      RAW_IP_ADDRESS_IN_SNIPPET: <no description>
      UNACCEPTABLE_CONTENT_SOFTWARE: <no description>
      UNAUTHORIZED_COOKIE_ON_GOOGLE_DOMAIN: <no description>
      UNDECLARED_FLASH_OBJECTS: <no description>
      INVALID_SSL_DECLARATION: <no description>
      DIRECT_DOWNLOAD_IN_AD: <no description>
      MAXIMUM_DOWNLOAD_SIZE_EXCEEDED: <no description>
      DESTINATION_URL_SITE_NOT_CRAWLABLE: <no description>
      BAD_URL_LEGAL_DISAPPROVAL: <no description>
      PHARMA_GAMBLING_ALCOHOL_NOT_ALLOWED: <no description>
      DYNAMIC_DNS_AT_DESTINATION_URL: <no description>
      POOR_IMAGE_OR_VIDEO_QUALITY: <no description>
      UNACCEPTABLE_IMAGE_CONTENT: <no description>
      INCORRECT_IMAGE_LAYOUT: <no description>
      IRRELEVANT_IMAGE_OR_VIDEO: <no description>
      DESTINATION_SITE_DOES_NOT_ALLOW_GOING_BACK: <no description>
      MISLEADING_CLAIMS_IN_AD: <no description>
      RESTRICTED_PRODUCTS: <no description>
      UNACCEPTABLE_CONTENT: <no description>
      AUTOMATED_AD_CLICKING: <no description>
      INVALID_URL_PROTOCOL: <no description>
      UNDECLARED_RESTRICTED_CONTENT: <no description>
      INVALID_REMARKETING_LIST_USAGE: <no description>
      DESTINATION_SITE_NOT_CRAWLABLE_ROBOTS_TXT: <no description>
      CLICK_TO_DOWNLOAD_NOT_AN_APP: <no description>
      INACCURATE_REVIEW_EXTENSION: <no description>
      SEXUALLY_EXPLICIT_CONTENT: <no description>
      GAINING_AN_UNFAIR_ADVANTAGE: <no description>
      GAMING_THE_GOOGLE_NETWORK: <no description>
      DANGEROUS_PRODUCTS_KNIVES: <no description>
      DANGEROUS_PRODUCTS_EXPLOSIVES: <no description>
      DANGEROUS_PRODUCTS_GUNS: <no description>
      DANGEROUS_PRODUCTS_DRUGS: <no description>
      DANGEROUS_PRODUCTS_TOBACCO: <no description>
      DANGEROUS_PRODUCTS_WEAPONS: <no description>
      UNCLEAR_OR_IRRELEVANT_AD: <no description>
      PROFESSIONAL_STANDARDS: <no description>
      DYSFUNCTIONAL_PROMOTION: <no description>
      INVALID_INTEREST_BASED_AD: <no description>
      MISUSE_OF_PERSONAL_INFORMATION: <no description>
      OMISSION_OF_RELEVANT_INFORMATION: <no description>
      UNAVAILABLE_PROMOTIONS: <no description>
      MISLEADING_PROMOTIONS: <no description>
      INAPPROPRIATE_CONTENT: <no description>
      SENSITIVE_EVENTS: <no description>
      SHOCKING_CONTENT: <no description>
      ENABLING_DISHONEST_BEHAVIOR: <no description>
      TECHNICAL_REQUIREMENTS: <no description>
      RESTRICTED_POLITICAL_CONTENT: <no description>
      UNSUPPORTED_CONTENT: <no description>
      INVALID_BIDDING_METHOD: <no description>
      VIDEO_TOO_LONG: <no description>
      VIOLATES_JAPANESE_PHARMACY_LAW: <no description>
      UNACCREDITED_PET_PHARMACY: <no description>
      ABORTION: <no description>
      CONTRACEPTIVES: <no description>
      NEED_CERTIFICATES_TO_ADVERTISE_IN_CHINA: <no description>
      KCDSP_REGISTRATION: <no description>
      NOT_FAMILY_SAFE: <no description>
      CLINICAL_TRIAL_RECRUITMENT: <no description>
      MAXIMUM_NUMBER_OF_HTTP_CALLS_EXCEEDED: <no description>
      MAXIMUM_NUMBER_OF_COOKIES_EXCEEDED: <no description>
      PERSONAL_LOANS: <no description>
      UNSUPPORTED_FLASH_CONTENT: <no description>
      MISUSE_BY_OMID_SCRIPT: <no description>
      NON_WHITELISTED_OMID_VENDOR: <no description>
      DESTINATION_EXPERIENCE: <no description>
      UNSUPPORTED_LANGUAGE: <no description>
      NON_SSL_COMPLIANT: <no description>
      TEMPORARY_PAUSE: <no description>
      BAIL_BONDS: <no description>
      EXPERIMENTAL_MEDICAL_TREATMENT: <no description>
    """
    LENGTH_OF_IMAGE_ANIMATION = 0
    BROKEN_URL = 1
    MEDIA_NOT_FUNCTIONAL = 2
    INVALID_FOURTH_PARTY_CALL = 3
    INCORRECT_REMARKETING_DECLARATION = 4
    LANDING_PAGE_ERROR = 5
    AD_SIZE_DOES_NOT_MATCH_AD_SLOT = 6
    NO_BORDER = 7
    FOURTH_PARTY_BROWSER_COOKIES = 8
    LSO_OBJECTS = 9
    BLANK_CREATIVE = 10
    DESTINATION_URLS_UNDECLARED = 11
    PROBLEM_WITH_CLICK_MACRO = 12
    INCORRECT_AD_TECHNOLOGY_DECLARATION = 13
    INCORRECT_DESTINATION_URL_DECLARATION = 14
    EXPANDABLE_INCORRECT_DIRECTION = 15
    EXPANDABLE_DIRECTION_NOT_SUPPORTED = 16
    EXPANDABLE_INVALID_VENDOR = 17
    EXPANDABLE_FUNCTIONALITY = 18
    VIDEO_INVALID_VENDOR = 19
    VIDEO_UNSUPPORTED_LENGTH = 20
    VIDEO_UNSUPPORTED_FORMAT = 21
    VIDEO_FUNCTIONALITY = 22
    LANDING_PAGE_DISABLED = 23
    MALWARE_SUSPECTED = 24
    ADULT_IMAGE_OR_VIDEO = 25
    INACCURATE_AD_TEXT = 26
    COUNTERFEIT_DESIGNER_GOODS = 27
    POP_UP = 28
    INVALID_RTB_PROTOCOL_USAGE = 29
    RAW_IP_ADDRESS_IN_SNIPPET = 30
    UNACCEPTABLE_CONTENT_SOFTWARE = 31
    UNAUTHORIZED_COOKIE_ON_GOOGLE_DOMAIN = 32
    UNDECLARED_FLASH_OBJECTS = 33
    INVALID_SSL_DECLARATION = 34
    DIRECT_DOWNLOAD_IN_AD = 35
    MAXIMUM_DOWNLOAD_SIZE_EXCEEDED = 36
    DESTINATION_URL_SITE_NOT_CRAWLABLE = 37
    BAD_URL_LEGAL_DISAPPROVAL = 38
    PHARMA_GAMBLING_ALCOHOL_NOT_ALLOWED = 39
    DYNAMIC_DNS_AT_DESTINATION_URL = 40
    POOR_IMAGE_OR_VIDEO_QUALITY = 41
    UNACCEPTABLE_IMAGE_CONTENT = 42
    INCORRECT_IMAGE_LAYOUT = 43
    IRRELEVANT_IMAGE_OR_VIDEO = 44
    DESTINATION_SITE_DOES_NOT_ALLOW_GOING_BACK = 45
    MISLEADING_CLAIMS_IN_AD = 46
    RESTRICTED_PRODUCTS = 47
    UNACCEPTABLE_CONTENT = 48
    AUTOMATED_AD_CLICKING = 49
    INVALID_URL_PROTOCOL = 50
    UNDECLARED_RESTRICTED_CONTENT = 51
    INVALID_REMARKETING_LIST_USAGE = 52
    DESTINATION_SITE_NOT_CRAWLABLE_ROBOTS_TXT = 53
    CLICK_TO_DOWNLOAD_NOT_AN_APP = 54
    INACCURATE_REVIEW_EXTENSION = 55
    SEXUALLY_EXPLICIT_CONTENT = 56
    GAINING_AN_UNFAIR_ADVANTAGE = 57
    GAMING_THE_GOOGLE_NETWORK = 58
    DANGEROUS_PRODUCTS_KNIVES = 59
    DANGEROUS_PRODUCTS_EXPLOSIVES = 60
    DANGEROUS_PRODUCTS_GUNS = 61
    DANGEROUS_PRODUCTS_DRUGS = 62
    DANGEROUS_PRODUCTS_TOBACCO = 63
    DANGEROUS_PRODUCTS_WEAPONS = 64
    UNCLEAR_OR_IRRELEVANT_AD = 65
    PROFESSIONAL_STANDARDS = 66
    DYSFUNCTIONAL_PROMOTION = 67
    INVALID_INTEREST_BASED_AD = 68
    MISUSE_OF_PERSONAL_INFORMATION = 69
    OMISSION_OF_RELEVANT_INFORMATION = 70
    UNAVAILABLE_PROMOTIONS = 71
    MISLEADING_PROMOTIONS = 72
    INAPPROPRIATE_CONTENT = 73
    SENSITIVE_EVENTS = 74
    SHOCKING_CONTENT = 75
    ENABLING_DISHONEST_BEHAVIOR = 76
    TECHNICAL_REQUIREMENTS = 77
    RESTRICTED_POLITICAL_CONTENT = 78
    UNSUPPORTED_CONTENT = 79
    INVALID_BIDDING_METHOD = 80
    VIDEO_TOO_LONG = 81
    VIOLATES_JAPANESE_PHARMACY_LAW = 82
    UNACCREDITED_PET_PHARMACY = 83
    ABORTION = 84
    CONTRACEPTIVES = 85
    NEED_CERTIFICATES_TO_ADVERTISE_IN_CHINA = 86
    KCDSP_REGISTRATION = 87
    NOT_FAMILY_SAFE = 88
    CLINICAL_TRIAL_RECRUITMENT = 89
    MAXIMUM_NUMBER_OF_HTTP_CALLS_EXCEEDED = 90
    MAXIMUM_NUMBER_OF_COOKIES_EXCEEDED = 91
    PERSONAL_LOANS = 92
    UNSUPPORTED_FLASH_CONTENT = 93
    MISUSE_BY_OMID_SCRIPT = 94
    NON_WHITELISTED_OMID_VENDOR = 95
    DESTINATION_EXPERIENCE = 96
    UNSUPPORTED_LANGUAGE = 97
    NON_SSL_COMPLIANT = 98
    TEMPORARY_PAUSE = 99
    BAIL_BONDS = 100
    EXPERIMENTAL_MEDICAL_TREATMENT = 101

  details = _messages.StringField(1, repeated=True)
  reason = _messages.EnumField('ReasonValueValuesEnum', 2)


class Empty(_messages.Message):
  r"""A generic empty message that you can re-use to avoid defining duplicated
  empty messages in your APIs. A typical example is to use it as the request or
  the response type of an API method. For instance: service Foo { rpc
  Bar(google.protobuf.Empty) returns (google.protobuf.Empty); }
  """


class FilterSet(_messages.Message):
  r"""A set of filters that is applied to a request for data. Within a filter
  set, an AND operation is performed across the filters represented by each
  field. An OR operation is performed across the filters represented by the
  multiple values of a repeated field, for example, "format=VIDEO AND deal_id=12
  AND (seller_network_id=34 OR seller_network_id=56)".

  Enums:
    BreakdownDimensionsValueListEntryValuesEnum: A
      BreakdownDimensionsValueListEntryValuesEnum object.
    EnvironmentValueValuesEnum: The environment on which to filter; optional.
    FormatValueValuesEnum: Creative format bidded on or allowed to bid on, can
      be empty.
    FormatsValueListEntryValuesEnum: A FormatsValueListEntryValuesEnum object.
    PlatformsValueListEntryValuesEnum: A PlatformsValueListEntryValuesEnum
      object.
    TimeSeriesGranularityValueValuesEnum: The granularity of time intervals if a
      time series breakdown is preferred; optional.

  Fields:
    absoluteDateRange: An absolute date range, defined by a start date and an
      end date. Interpreted relative to Pacific time zone.
    breakdownDimensions: The set of dimensions along which to break down the
      response; may be empty. If multiple dimensions are requested, the
      breakdown is along the Cartesian product of the requested dimensions.
    creativeId: The ID of the creative on which to filter; optional. This field
      may be set only for a filter set that accesses account-level
      troubleshooting data, for example, one whose name matches the
      `bidders/*\/accounts/*\/filterSets/*` pattern.
    dealId: The ID of the deal on which to filter; optional. This field may be
      set only for a filter set that accesses account-level troubleshooting
      data, for example, one whose name matches the
      `bidders/*\/accounts/*\/filterSets/*` pattern.
    environment: The environment on which to filter; optional.
    format: Creative format bidded on or allowed to bid on, can be empty.
    formats: Creative formats bidded on or allowed to bid on, can be empty.
      Although this field is a list, it can only be populated with a single
      item. A HTTP 400 bad request error will be returned in the response if you
      specify multiple items.
    name: A user-defined name of the filter set. Filter set names must be unique
      globally and match one of the patterns: - `bidders/*\/filterSets/*` (for
      accessing bidder-level troubleshooting data) -
      `bidders/*\/accounts/*\/filterSets/*` (for accessing account-level
      troubleshooting data) This field is required in create operations.
    platforms: The list of platforms on which to filter; may be empty. The
      filters represented by multiple platforms are ORed together (for example,
      if non-empty, results must match any one of the platforms).
    publisherIdentifiers: For Open Bidding partners only. The list of publisher
      identifiers on which to filter; may be empty. The filters represented by
      multiple publisher identifiers are ORed together.
    realtimeTimeRange: An open-ended realtime time range, defined by the
      aggregation start timestamp.
    relativeDateRange: A relative date range, defined by an offset from today
      and a duration. Interpreted relative to Pacific time zone.
    sellerNetworkIds: For Authorized Buyers only. The list of IDs of the seller
      (publisher) networks on which to filter; may be empty. The filters
      represented by multiple seller network IDs are ORed together (for example,
      if non-empty, results must match any one of the publisher networks). See
      [seller-network-ids](https://developers.google.com/authorized-buyers/rtb/downloads/seller-network-ids)
      file for the set of existing seller network IDs.
    timeSeriesGranularity: The granularity of time intervals if a time series
      breakdown is preferred; optional.
  """

  class BreakdownDimensionsValueListEntryValuesEnum(_messages.Enum):
    r"""A BreakdownDimensionsValueListEntryValuesEnum object.

    Values:
      BREAKDOWN_DIMENSION_UNSPECIFIED: <no description>
      PUBLISHER_IDENTIFIER: <no description>
    """
    BREAKDOWN_DIMENSION_UNSPECIFIED = 0
    PUBLISHER_IDENTIFIER = 1

  class EnvironmentValueValuesEnum(_messages.Enum):
    r"""The environment on which to filter; optional.

    Values:
      ENVIRONMENT_UNSPECIFIED: <no description>
      WEB: <no description>
      APP: <no description>
    """
    ENVIRONMENT_UNSPECIFIED = 0
    WEB = 1
    APP = 2

  class FormatValueValuesEnum(_messages.Enum):
    r"""Creative format bidded on or allowed to bid on, can be empty.

    Values:
      FORMAT_UNSPECIFIED: <no description>
      NATIVE_DISPLAY: <no description>
      NATIVE_VIDEO: <no description>
      NON_NATIVE_DISPLAY: <no description>
      NON_NATIVE_VIDEO: <no description>
    """
    FORMAT_UNSPECIFIED = 0
    NATIVE_DISPLAY = 1
    NATIVE_VIDEO = 2
    NON_NATIVE_DISPLAY = 3
    NON_NATIVE_VIDEO = 4

  class FormatsValueListEntryValuesEnum(_messages.Enum):
    r"""A FormatsValueListEntryValuesEnum object.

    Values:
      FORMAT_UNSPECIFIED: <no description>
      NATIVE_DISPLAY: <no description>
      NATIVE_VIDEO: <no description>
      NON_NATIVE_DISPLAY: <no description>
      NON_NATIVE_VIDEO: <no description>
    """
    FORMAT_UNSPECIFIED = 0
    NATIVE_DISPLAY = 1
    NATIVE_VIDEO = 2
    NON_NATIVE_DISPLAY = 3
    NON_NATIVE_VIDEO = 4

  class PlatformsValueListEntryValuesEnum(_messages.Enum):
    r"""A PlatformsValueListEntryValuesEnum object.

    Values:
      PLATFORM_UNSPECIFIED: <no description>
      DESKTOP: <no description>
      TABLET: <no description>
      MOBILE: <no description>
    """
    PLATFORM_UNSPECIFIED = 0
    DESKTOP = 1
    TABLET = 2
    MOBILE = 3

  class TimeSeriesGranularityValueValuesEnum(_messages.Enum):
    r"""The granularity of time intervals if a time series breakdown is
    preferred; optional.

    Values:
      TIME_SERIES_GRANULARITY_UNSPECIFIED: <no description>
      HOURLY: <no description>
      DAILY: <no description>
    """
    TIME_SERIES_GRANULARITY_UNSPECIFIED = 0
    HOURLY = 1
    DAILY = 2

  absoluteDateRange = _messages.MessageField('AbsoluteDateRange', 1)
  breakdownDimensions = _messages.EnumField('BreakdownDimensionsValueListEntryValuesEnum', 2, repeated=True)
  creativeId = _messages.StringField(3)
  dealId = _messages.IntegerField(4, variant=_messages.Variant.INT64)
  environment = _messages.EnumField('EnvironmentValueValuesEnum', 5)
  format = _messages.EnumField('FormatValueValuesEnum', 6)
  formats = _messages.EnumField('FormatsValueListEntryValuesEnum', 7, repeated=True)
  name = _messages.StringField(8)
  platforms = _messages.EnumField('PlatformsValueListEntryValuesEnum', 9, repeated=True)
  publisherIdentifiers = _messages.StringField(10, repeated=True)
  realtimeTimeRange = _messages.MessageField('RealtimeTimeRange', 11)
  relativeDateRange = _messages.MessageField('RelativeDateRange', 12)
  sellerNetworkIds = _messages.IntegerField(13, variant=_messages.Variant.INT32, repeated=True)
  timeSeriesGranularity = _messages.EnumField('TimeSeriesGranularityValueValuesEnum', 14)


class FilteredBidCreativeRow(_messages.Message):
  r"""The number of filtered bids with the specified dimension values that have
  the specified creative.

  Fields:
    bidCount: The number of bids with the specified creative.
    creativeId: The ID of the creative.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
  """

  bidCount = _messages.MessageField('MetricValue', 1)
  creativeId = _messages.StringField(2)
  rowDimensions = _messages.MessageField('RowDimensions', 3)


class FilteredBidDetailRow(_messages.Message):
  r"""The number of filtered bids with the specified dimension values, among
  those filtered due to the requested filtering reason (for example, creative
  status), that have the specified detail.

  Fields:
    bidCount: The number of bids with the specified detail.
    detail: The ID of the detail, can be numeric or text. The associated value
      can be looked up in the dictionary file corresponding to the DetailType in
      the response message.
    detailId: Note: this field will be deprecated, use "detail" field instead.
      When "detail" field represents an integer value, this field is populated
      as the same integer value "detail" field represents, otherwise this field
      will be 0. The ID of the detail. The associated value can be looked up in
      the dictionary file corresponding to the DetailType in the response
      message.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
  """

  bidCount = _messages.MessageField('MetricValue', 1)
  detail = _messages.StringField(2)
  detailId = _messages.IntegerField(3, variant=_messages.Variant.INT32)
  rowDimensions = _messages.MessageField('RowDimensions', 4)


class FirstPartyMobileApplicationTargeting(_messages.Message):
  r"""Represents a list of targeted and excluded mobile application IDs that
  publishers own. Mobile application IDs are from App Store and Google Play
  Store. Android App ID, for example, com.google.android.apps.maps, can be found
  in Google Play Store URL. iOS App ID (which is a number) can be found at the
  end of iTunes store URL. First party mobile applications is either included or
  excluded.

  Fields:
    excludedAppIds: A list of application IDs to be excluded.
    targetedAppIds: A list of application IDs to be included.
  """

  excludedAppIds = _messages.StringField(1, repeated=True)
  targetedAppIds = _messages.StringField(2, repeated=True)


class FrequencyCap(_messages.Message):
  r"""Frequency cap.

  Enums:
    TimeUnitTypeValueValuesEnum: The time unit. Along with num_time_units
      defines the amount of time over which impressions per user are counted and
      capped.

  Fields:
    maxImpressions: The maximum number of impressions that can be served to a
      user within the specified time period.
    numTimeUnits: The amount of time, in the units specified by time_unit_type.
      Defines the amount of time over which impressions per user are counted and
      capped.
    timeUnitType: The time unit. Along with num_time_units defines the amount of
      time over which impressions per user are counted and capped.
  """

  class TimeUnitTypeValueValuesEnum(_messages.Enum):
    r"""The time unit. Along with num_time_units defines the amount of time over
    which impressions per user are counted and capped.

    Values:
      TIME_UNIT_TYPE_UNSPECIFIED: <no description>
      MINUTE: <no description>
      HOUR: <no description>
      DAY: <no description>
      WEEK: <no description>
      MONTH: <no description>
      LIFETIME: <no description>
      POD: <no description>
      STREAM: <no description>
    """
    TIME_UNIT_TYPE_UNSPECIFIED = 0
    MINUTE = 1
    HOUR = 2
    DAY = 3
    WEEK = 4
    MONTH = 5
    LIFETIME = 6
    POD = 7
    STREAM = 8

  maxImpressions = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  numTimeUnits = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  timeUnitType = _messages.EnumField('TimeUnitTypeValueValuesEnum', 3)


class GuaranteedFixedPriceTerms(_messages.Message):
  r"""Terms for Programmatic Guaranteed Deals.

  Enums:
    ReservationTypeValueValuesEnum: The reservation type for a Programmatic
      Guaranteed deal. This indicates whether the number of impressions is
      fixed, or a percent of available impressions. If not specified, the
      default reservation type is STANDARD.

  Fields:
    fixedPrices: Fixed price for the specified buyer.
    guaranteedImpressions: Guaranteed impressions as a percentage. This is the
      percentage of guaranteed looks that the buyer is guaranteeing to buy.
    guaranteedLooks: Count of guaranteed looks. Required for deal, optional for
      product.
    impressionCap: The lifetime impression cap for CPM sponsorship deals. The
      deal will stop serving when the cap is reached.
    minimumDailyLooks: Daily minimum looks for CPD deal types.
    percentShareOfVoice: For sponsorship deals, this is the percentage of the
      seller's eligible impressions that the deal will serve until the cap is
      reached.
    reservationType: The reservation type for a Programmatic Guaranteed deal.
      This indicates whether the number of impressions is fixed, or a percent of
      available impressions. If not specified, the default reservation type is
      STANDARD.
  """

  class ReservationTypeValueValuesEnum(_messages.Enum):
    r"""The reservation type for a Programmatic Guaranteed deal. This indicates
    whether the number of impressions is fixed, or a percent of available
    impressions. If not specified, the default reservation type is STANDARD.

    Values:
      RESERVATION_TYPE_UNSPECIFIED: <no description>
      STANDARD: <no description>
      SPONSORSHIP: <no description>
    """
    RESERVATION_TYPE_UNSPECIFIED = 0
    STANDARD = 1
    SPONSORSHIP = 2

  fixedPrices = _messages.MessageField('PricePerBuyer', 1, repeated=True)
  guaranteedImpressions = _messages.IntegerField(2, variant=_messages.Variant.INT64)
  guaranteedLooks = _messages.IntegerField(3, variant=_messages.Variant.INT64)
  impressionCap = _messages.IntegerField(4, variant=_messages.Variant.INT64)
  minimumDailyLooks = _messages.IntegerField(5, variant=_messages.Variant.INT64)
  percentShareOfVoice = _messages.IntegerField(6, variant=_messages.Variant.INT64)
  reservationType = _messages.EnumField('ReservationTypeValueValuesEnum', 7)


class HtmlContent(_messages.Message):
  r"""HTML content for a creative.

  Fields:
    height: The height of the HTML snippet in pixels.
    snippet: The HTML snippet that displays the ad when inserted in the web
      page.
    width: The width of the HTML snippet in pixels.
  """

  height = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  snippet = _messages.StringField(2)
  width = _messages.IntegerField(3, variant=_messages.Variant.INT32)


class Image(_messages.Message):
  r"""An image resource. You may provide a larger image than was requested, so
  long as the aspect ratio is preserved.

  Fields:
    height: Image height in pixels.
    url: The URL of the image.
    width: Image width in pixels.
  """

  height = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  url = _messages.StringField(2)
  width = _messages.IntegerField(3, variant=_messages.Variant.INT32)


class ImpressionMetricsRow(_messages.Message):
  r"""The set of metrics that are measured in numbers of impressions,
  representing how many impressions with the specified dimension values were
  considered eligible at each stage of the bidding funnel.

  Fields:
    availableImpressions: The number of impressions available to the buyer on Ad
      Exchange. In some cases this value may be unavailable.
    bidRequests: The number of impressions for which Ad Exchange sent the buyer
      a bid request.
    inventoryMatches: The number of impressions that match the buyer's inventory
      pretargeting.
    responsesWithBids: The number of impressions for which Ad Exchange received
      a response from the buyer that contained at least one applicable bid.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
    successfulResponses: The number of impressions for which the buyer
      successfully sent a response to Ad Exchange.
  """

  availableImpressions = _messages.MessageField('MetricValue', 1)
  bidRequests = _messages.MessageField('MetricValue', 2)
  inventoryMatches = _messages.MessageField('MetricValue', 3)
  responsesWithBids = _messages.MessageField('MetricValue', 4)
  rowDimensions = _messages.MessageField('RowDimensions', 5)
  successfulResponses = _messages.MessageField('MetricValue', 6)


class InventorySizeTargeting(_messages.Message):
  r"""Represents the size of an ad unit that can be targeted on an ad request.
  It only applies to Private Auction, AdX Preferred Deals and Auction Packages.
  This targeting does not apply to Programmatic Guaranteed and Preferred Deals
  in Ad Manager.

  Fields:
    excludedInventorySizes: A list of inventory sizes to be excluded.
    targetedInventorySizes: A list of inventory sizes to be included.
  """

  excludedInventorySizes = _messages.MessageField('AdSize', 1, repeated=True)
  targetedInventorySizes = _messages.MessageField('AdSize', 2, repeated=True)


class ListBidMetricsResponse(_messages.Message):
  r"""Response message for listing the metrics that are measured in number of
  bids.

  Fields:
    bidMetricsRows: List of rows, each containing a set of bid metrics.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListBidMetricsRequest.pageToken field in the subsequent call to the
      bidMetrics.list method to retrieve the next page of results.
  """

  bidMetricsRows = _messages.MessageField('BidMetricsRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListBidResponseErrorsResponse(_messages.Message):
  r"""Response message for listing all reasons that bid responses resulted in an
  error.

  Fields:
    calloutStatusRows: List of rows, with counts of bid responses aggregated by
      callout status.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListBidResponseErrorsRequest.pageToken field in the subsequent call
      to the bidResponseErrors.list method to retrieve the next page of results.
  """

  calloutStatusRows = _messages.MessageField('CalloutStatusRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListBidResponsesWithoutBidsResponse(_messages.Message):
  r"""Response message for listing all reasons that bid responses were
  considered to have no applicable bids.

  Fields:
    bidResponseWithoutBidsStatusRows: List of rows, with counts of bid responses
      without bids aggregated by status.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListBidResponsesWithoutBidsRequest.pageToken field in the
      subsequent call to the bidResponsesWithoutBids.list method to retrieve the
      next page of results.
  """

  bidResponseWithoutBidsStatusRows = _messages.MessageField('BidResponseWithoutBidsStatusRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListClientUserInvitationsResponse(_messages.Message):
  r"""A ListClientUserInvitationsResponse object.

  Fields:
    invitations: The returned list of client users.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListClientUserInvitationsRequest.pageToken field in the subsequent
      call to the clients.invitations.list method to retrieve the next page of
      results.
  """

  invitations = _messages.MessageField('ClientUserInvitation', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListClientUsersResponse(_messages.Message):
  r"""A ListClientUsersResponse object.

  Fields:
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListClientUsersRequest.pageToken field in the subsequent call to
      the clients.invitations.list method to retrieve the next page of results.
    users: The returned list of client users.
  """

  nextPageToken = _messages.StringField(1)
  users = _messages.MessageField('ClientUser', 2, repeated=True)


class ListClientsResponse(_messages.Message):
  r"""A ListClientsResponse object.

  Fields:
    clients: The returned list of clients.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListClientsRequest.pageToken field in the subsequent call to the
      accounts.clients.list method to retrieve the next page of results.
  """

  clients = _messages.MessageField('Client', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListCreativeStatusBreakdownByCreativeResponse(_messages.Message):
  r"""Response message for listing all creatives associated with a given
  filtered bid reason.

  Fields:
    filteredBidCreativeRows: List of rows, with counts of bids with a given
      creative status aggregated by creative.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListCreativeStatusBreakdownByCreativeRequest.pageToken field in the
      subsequent call to the filteredBids.creatives.list method to retrieve the
      next page of results.
  """

  filteredBidCreativeRows = _messages.MessageField('FilteredBidCreativeRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListCreativeStatusBreakdownByDetailResponse(_messages.Message):
  r"""Response message for listing all details associated with a given filtered
  bid reason.

  Enums:
    DetailTypeValueValuesEnum: The type of detail that the detail IDs represent.

  Fields:
    detailType: The type of detail that the detail IDs represent.
    filteredBidDetailRows: List of rows, with counts of bids with a given
      creative status aggregated by detail.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListCreativeStatusBreakdownByDetailRequest.pageToken field in the
      subsequent call to the filteredBids.details.list method to retrieve the
      next page of results.
  """

  class DetailTypeValueValuesEnum(_messages.Enum):
    r"""The type of detail that the detail IDs represent.

    Values:
      DETAIL_TYPE_UNSPECIFIED: <no description>
      CREATIVE_ATTRIBUTE: <no description>
      VENDOR: <no description>
      SENSITIVE_CATEGORY: <no description>
      PRODUCT_CATEGORY: <no description>
      DISAPPROVAL_REASON: <no description>
      POLICY_TOPIC: <no description>
      ATP_VENDOR: <no description>
      VENDOR_DOMAIN: <no description>
      GVL_ID: <no description>
    """
    DETAIL_TYPE_UNSPECIFIED = 0
    CREATIVE_ATTRIBUTE = 1
    VENDOR = 2
    SENSITIVE_CATEGORY = 3
    PRODUCT_CATEGORY = 4
    DISAPPROVAL_REASON = 5
    POLICY_TOPIC = 6
    ATP_VENDOR = 7
    VENDOR_DOMAIN = 8
    GVL_ID = 9

  detailType = _messages.EnumField('DetailTypeValueValuesEnum', 1)
  filteredBidDetailRows = _messages.MessageField('FilteredBidDetailRow', 2, repeated=True)
  nextPageToken = _messages.StringField(3)


class ListCreativesResponse(_messages.Message):
  r"""A response for listing creatives.

  Fields:
    creatives: The list of creatives.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListCreativesRequest.page_token field in the subsequent call to
      `ListCreatives` method to retrieve the next page of results.
  """

  creatives = _messages.MessageField('Creative', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListDealAssociationsResponse(_messages.Message):
  r"""A response for listing creative and deal associations

  Fields:
    associations: The list of associations.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListDealAssociationsRequest.page_token field in the subsequent call
      to 'ListDealAssociation' method to retrieve the next page of results.
  """

  associations = _messages.MessageField('CreativeDealAssociation', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListFilterSetsResponse(_messages.Message):
  r"""Response message for listing filter sets.

  Fields:
    filterSets: The filter sets belonging to the buyer.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListFilterSetsRequest.pageToken field in the subsequent call to the
      accounts.filterSets.list method to retrieve the next page of results.
  """

  filterSets = _messages.MessageField('FilterSet', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListFilteredBidRequestsResponse(_messages.Message):
  r"""Response message for listing all reasons that bid requests were filtered
  and not sent to the buyer.

  Fields:
    calloutStatusRows: List of rows, with counts of filtered bid requests
      aggregated by callout status.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListFilteredBidRequestsRequest.pageToken field in the subsequent
      call to the filteredBidRequests.list method to retrieve the next page of
      results.
  """

  calloutStatusRows = _messages.MessageField('CalloutStatusRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListFilteredBidsResponse(_messages.Message):
  r"""Response message for listing all reasons that bids were filtered from the
  auction.

  Fields:
    creativeStatusRows: List of rows, with counts of filtered bids aggregated by
      filtering reason (for example, creative status).
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListFilteredBidsRequest.pageToken field in the subsequent call to
      the filteredBids.list method to retrieve the next page of results.
  """

  creativeStatusRows = _messages.MessageField('CreativeStatusRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListImpressionMetricsResponse(_messages.Message):
  r"""Response message for listing the metrics that are measured in number of
  impressions.

  Fields:
    impressionMetricsRows: List of rows, each containing a set of impression
      metrics.
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListImpressionMetricsRequest.pageToken field in the subsequent call
      to the impressionMetrics.list method to retrieve the next page of results.
  """

  impressionMetricsRows = _messages.MessageField('ImpressionMetricsRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListLosingBidsResponse(_messages.Message):
  r"""Response message for listing all reasons that bids lost in the auction.

  Fields:
    creativeStatusRows: List of rows, with counts of losing bids aggregated by
      loss reason (for example, creative status).
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListLosingBidsRequest.pageToken field in the subsequent call to the
      losingBids.list method to retrieve the next page of results.
  """

  creativeStatusRows = _messages.MessageField('CreativeStatusRow', 1, repeated=True)
  nextPageToken = _messages.StringField(2)


class ListNonBillableWinningBidsResponse(_messages.Message):
  r"""Response message for listing all reasons for which a buyer was not billed
  for a winning bid.

  Fields:
    nextPageToken: A token to retrieve the next page of results. Pass this value
      in the ListNonBillableWinningBidsRequest.pageToken field in the subsequent
      call to the nonBillableWinningBids.list method to retrieve the next page
      of results.
    nonBillableWinningBidStatusRows: List of rows, with counts of bids not
      billed aggregated by reason.
  """

  nextPageToken = _messages.StringField(1)
  nonBillableWinningBidStatusRows = _messages.MessageField('NonBillableWinningBidStatusRow', 2, repeated=True)


class ListProductsResponse(_messages.Message):
  r"""Response message for listing products visible to the buyer.

  Fields:
    nextPageToken: List pagination support.
    products: The list of matching products at their head revision number.
  """

  nextPageToken = _messages.StringField(1)
  products = _messages.MessageField('Product', 2, repeated=True)


class ListProposalsResponse(_messages.Message):
  r"""Response message for listing proposals.

  Fields:
    nextPageToken: Continuation token for fetching the next page of results.
    proposals: The list of proposals.
  """

  nextPageToken = _messages.StringField(1)
  proposals = _messages.MessageField('Proposal', 2, repeated=True)


class ListPublisherProfilesResponse(_messages.Message):
  r"""Response message for profiles visible to the buyer.

  Fields:
    nextPageToken: List pagination support
    publisherProfiles: The list of matching publisher profiles.
  """

  nextPageToken = _messages.StringField(1)
  publisherProfiles = _messages.MessageField('PublisherProfile', 2, repeated=True)


class LocationContext(_messages.Message):
  r"""Output only. The Geo criteria the restriction applies to.

  Fields:
    geoCriteriaIds: IDs representing the geo location for this context. Refer to
      the
      [geo-table.csv](https://storage.googleapis.com/adx-rtb-dictionaries/geo-table.csv)
      file for different geo criteria IDs.
  """

  geoCriteriaIds = _messages.IntegerField(1, variant=_messages.Variant.INT32, repeated=True)


class MarketplaceTargeting(_messages.Message):
  r"""Targeting represents different criteria that can be used by advertisers to
  target ad inventory. For example, they can choose to target ad requests only
  if the user is in the US. Multiple types of targeting are always applied as a
  logical AND, unless noted otherwise.

  Fields:
    geoTargeting: Geo criteria IDs to be included/excluded.
    inventorySizeTargeting: Inventory sizes to be included/excluded.
    placementTargeting: Placement targeting information, for example, URL,
      mobile applications.
    technologyTargeting: Technology targeting information, for example,
      operating system, device category.
    videoTargeting: Video targeting information.
  """

  geoTargeting = _messages.MessageField('CriteriaTargeting', 1)
  inventorySizeTargeting = _messages.MessageField('InventorySizeTargeting', 2)
  placementTargeting = _messages.MessageField('PlacementTargeting', 3)
  technologyTargeting = _messages.MessageField('TechnologyTargeting', 4)
  videoTargeting = _messages.MessageField('VideoTargeting', 5)


class MetricValue(_messages.Message):
  r"""A metric value, with an expected value and a variance; represents a count
  that may be either exact or estimated (for example, when sampled).

  Fields:
    value: The expected value of the metric.
    variance: The variance (for example, square of the standard deviation) of
      the metric value. If value is exact, variance is 0. Can be used to
      calculate margin of error as a percentage of value, using the following
      formula, where Z is the standard constant that depends on the preferred
      size of the confidence interval (for example, for 90% confidence interval,
      use Z = 1.645): marginOfError = 100 * Z * sqrt(variance) / value
  """

  value = _messages.IntegerField(1, variant=_messages.Variant.INT64)
  variance = _messages.IntegerField(2, variant=_messages.Variant.INT64)


class MobileApplicationTargeting(_messages.Message):
  r"""Mobile application targeting settings.

  Fields:
    firstPartyTargeting: Publisher owned apps to be targeted or excluded by the
      publisher to display the ads in.
  """

  firstPartyTargeting = _messages.MessageField('FirstPartyMobileApplicationTargeting', 1)


class Money(_messages.Message):
  r"""Represents an amount of money with its currency type.

  Fields:
    currencyCode: The three-letter currency code defined in ISO 4217.
    nanos: Number of nano (10^-9) units of the amount. The value must be between
      -999,999,999 and +999,999,999 inclusive. If `units` is positive, `nanos`
      must be positive or zero. If `units` is zero, `nanos` can be positive,
      zero, or negative. If `units` is negative, `nanos` must be negative or
      zero. For example $-1.75 is represented as `units`=-1 and
      `nanos`=-750,000,000.
    units: The whole units of the amount. For example if `currencyCode` is
      `"USD"`, then 1 unit is one US dollar.
  """

  currencyCode = _messages.StringField(1)
  nanos = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  units = _messages.IntegerField(3, variant=_messages.Variant.INT64)


class NativeContent(_messages.Message):
  r"""Native content for a creative.

  Fields:
    advertiserName: The name of the advertiser or sponsor, to be displayed in
      the ad creative.
    appIcon: The app icon, for app download ads.
    body: A long description of the ad.
    callToAction: A label for the button that the user is supposed to click.
    clickLinkUrl: The URL that the browser/SDK will load when the user clicks
      the ad.
    clickTrackingUrl: The URL to use for click tracking.
    headline: A short title for the ad.
    image: A large image.
    logo: A smaller image, for the advertiser's logo.
    priceDisplayText: The price of the promoted app including currency info.
    starRating: The app rating in the app store. Must be in the range [0-5].
    storeUrl: The URL to the app store to purchase/download the promoted app.
    videoUrl: The URL to fetch a native video ad.
  """

  advertiserName = _messages.StringField(1)
  appIcon = _messages.MessageField('Image', 2)
  body = _messages.StringField(3)
  callToAction = _messages.StringField(4)
  clickLinkUrl = _messages.StringField(5)
  clickTrackingUrl = _messages.StringField(6)
  headline = _messages.StringField(7)
  image = _messages.MessageField('Image', 8)
  logo = _messages.MessageField('Image', 9)
  priceDisplayText = _messages.StringField(10)
  starRating = _messages.FloatField(11, variant=_messages.Variant.DOUBLE)
  storeUrl = _messages.StringField(12)
  videoUrl = _messages.StringField(13)


class NonBillableWinningBidStatusRow(_messages.Message):
  r"""The number of winning bids with the specified dimension values for which
  the buyer was not billed, as described by the specified status.

  Enums:
    StatusValueValuesEnum: The status specifying why the winning bids were not
      billed.

  Fields:
    bidCount: The number of bids with the specified status.
    rowDimensions: The values of all dimensions associated with metric values in
      this row.
    status: The status specifying why the winning bids were not billed.
  """

  class StatusValueValuesEnum(_messages.Enum):
    r"""The status specifying why the winning bids were not billed.

    Values:
      STATUS_UNSPECIFIED: <no description>
      AD_NOT_RENDERED: <no description>
      INVALID_IMPRESSION: <no description>
      FATAL_VAST_ERROR: <no description>
      LOST_IN_MEDIATION: <no description>
    """
    STATUS_UNSPECIFIED = 0
    AD_NOT_RENDERED = 1
    INVALID_IMPRESSION = 2
    FATAL_VAST_ERROR = 3
    LOST_IN_MEDIATION = 4

  bidCount = _messages.MessageField('MetricValue', 1)
  rowDimensions = _messages.MessageField('RowDimensions', 2)
  status = _messages.EnumField('StatusValueValuesEnum', 3)


class NonGuaranteedAuctionTerms(_messages.Message):
  r"""Terms for Private Auctions. Note that Private Auctions can be created only
  by the seller, but they can be returned in a get or list request.

  Fields:
    autoOptimizePrivateAuction: True if open auction buyers are allowed to
      compete with invited buyers in this private auction.
    reservePricesPerBuyer: Reserve price for the specified buyer.
  """

  autoOptimizePrivateAuction = _messages.BooleanField(1)
  reservePricesPerBuyer = _messages.MessageField('PricePerBuyer', 2, repeated=True)


class NonGuaranteedFixedPriceTerms(_messages.Message):
  r"""Terms for Preferred Deals.

  Fields:
    fixedPrices: Fixed price for the specified buyer.
  """

  fixedPrices = _messages.MessageField('PricePerBuyer', 1, repeated=True)


class Note(_messages.Message):
  r"""A proposal may be associated to several notes.

  Enums:
    CreatorRoleValueValuesEnum: Output only. The role of the person
      (buyer/seller) creating the note.

  Fields:
    createTime: Output only. The timestamp for when this note was created.
    creatorRole: Output only. The role of the person (buyer/seller) creating the
      note.
    note: The actual note to attach. (max-length: 1024 unicode code units) Note:
      This field may be set only when creating the resource. Modifying this
      field while updating the resource will result in an error.
    noteId: Output only. The unique ID for the note.
    proposalRevision: Output only. The revision number of the proposal when the
      note is created.
  """

  class CreatorRoleValueValuesEnum(_messages.Enum):
    r"""Output only. The role of the person (buyer/seller) creating the note.

    Values:
      BUYER_SELLER_ROLE_UNSPECIFIED: <no description>
      BUYER: <no description>
      SELLER: <no description>
    """
    BUYER_SELLER_ROLE_UNSPECIFIED = 0
    BUYER = 1
    SELLER = 2

  createTime = _message_types.DateTimeField(1)
  creatorRole = _messages.EnumField('CreatorRoleValueValuesEnum', 2)
  note = _messages.StringField(3)
  noteId = _messages.StringField(4)
  proposalRevision = _messages.IntegerField(5, variant=_messages.Variant.INT64)


class OperatingSystemTargeting(_messages.Message):
  r"""Represents targeting information for operating systems.

  Fields:
    operatingSystemCriteria: IDs of operating systems to be included/excluded.
    operatingSystemVersionCriteria: IDs of operating system versions to be
      included/excluded.
  """

  operatingSystemCriteria = _messages.MessageField('CriteriaTargeting', 1)
  operatingSystemVersionCriteria = _messages.MessageField('CriteriaTargeting', 2)


class PauseProposalDealsRequest(_messages.Message):
  r"""Request message to pause serving for finalized deals.

  Fields:
    externalDealIds: The external_deal_id's of the deals to be paused. If empty,
      all the deals in the proposal will be paused.
    reason: The reason why the deals are being paused. This human readable
      message will be displayed in the seller's UI. (Max length: 1000 unicode
      code units.)
  """

  externalDealIds = _messages.StringField(1, repeated=True)
  reason = _messages.StringField(2)


class PauseProposalRequest(_messages.Message):
  r"""Request message to pause serving for an already-finalized proposal.

  Fields:
    reason: The reason why the proposal is being paused. This human readable
      message will be displayed in the seller's UI. (Max length: 1000 unicode
      code units.)
  """

  reason = _messages.StringField(1)


class PlacementTargeting(_messages.Message):
  r"""Represents targeting about where the ads can appear, for example, certain
  sites or mobile applications. Different placement targeting types will be
  logically OR'ed.

  Fields:
    mobileApplicationTargeting: Mobile application targeting information in a
      deal. This doesn't apply to Auction Packages.
    urlTargeting: URLs to be included/excluded.
  """

  mobileApplicationTargeting = _messages.MessageField('MobileApplicationTargeting', 1)
  urlTargeting = _messages.MessageField('UrlTargeting', 2)


class PlatformContext(_messages.Message):
  r"""Output only. The type of platform the restriction applies to.

  Enums:
    PlatformsValueListEntryValuesEnum: A PlatformsValueListEntryValuesEnum
      object.

  Fields:
    platforms: The platforms this restriction applies to.
  """

  class PlatformsValueListEntryValuesEnum(_messages.Enum):
    r"""A PlatformsValueListEntryValuesEnum object.

    Values:
      DESKTOP: <no description>
      ANDROID: <no description>
      IOS: <no description>
    """
    DESKTOP = 0
    ANDROID = 1
    IOS = 2

  platforms = _messages.EnumField('PlatformsValueListEntryValuesEnum', 1, repeated=True)


class Price(_messages.Message):
  r"""Represents a price and a pricing type for a product / deal.

  Enums:
    PricingTypeValueValuesEnum: The pricing type for the deal/product. (default:
      CPM)

  Fields:
    amount: The actual price with currency specified.
    pricingType: The pricing type for the deal/product. (default: CPM)
  """

  class PricingTypeValueValuesEnum(_messages.Enum):
    r"""The pricing type for the deal/product. (default: CPM)

    Values:
      PRICING_TYPE_UNSPECIFIED: <no description>
      COST_PER_MILLE: <no description>
      COST_PER_DAY: <no description>
    """
    PRICING_TYPE_UNSPECIFIED = 0
    COST_PER_MILLE = 1
    COST_PER_DAY = 2

  amount = _messages.MessageField('Money', 1)
  pricingType = _messages.EnumField('PricingTypeValueValuesEnum', 2)


class PricePerBuyer(_messages.Message):
  r"""Used to specify pricing rules for buyers/advertisers. Each PricePerBuyer
  in a product can become 0 or 1 deals. To check if there is a PricePerBuyer for
  a particular buyer or buyer/advertiser pair, we look for the most specific
  matching rule - we first look for a rule matching the buyer and advertiser,
  next a rule with the buyer but an empty advertiser list, and otherwise look
  for a matching rule where no buyer is set.

  Fields:
    advertiserIds: The list of advertisers for this price when associated with
      this buyer. If empty, all advertisers with this buyer pay this price.
    buyer: The buyer who will pay this price. If unset, all buyers can pay this
      price (if the advertisers match, and there's no more specific rule
      matching the buyer).
    price: The specified price.
  """

  advertiserIds = _messages.StringField(1, repeated=True)
  buyer = _messages.MessageField('Buyer', 2)
  price = _messages.MessageField('Price', 3)


class PrivateData(_messages.Message):
  r"""Buyers are allowed to store certain types of private data in a
  proposal/deal.

  Fields:
    referenceId: A buyer or seller specified reference ID. This can be queried
      in the list operations (max-length: 1024 unicode code units).
  """

  referenceId = _messages.StringField(1)


class Product(_messages.Message):
  r"""A product is a segment of inventory that a seller wants to sell. It is
  associated with certain terms and targeting information which helps the buyer
  know more about the inventory.

  Enums:
    SyndicationProductValueValuesEnum: The syndication product associated with
      the deal.

  Fields:
    availableEndTime: The proposed end time for the deal. The field will be
      truncated to the order of seconds during serving.
    availableStartTime: Inventory availability dates. The start time will be
      truncated to seconds during serving. Thus, a field specified as
      3:23:34.456 (HH:mm:ss.SSS) will be truncated to 3:23:34 when serving.
    createTime: Creation time.
    creatorContacts: Optional contact information for the creator of this
      product.
    displayName: The display name for this product as set by the seller.
    hasCreatorSignedOff: If the creator has already signed off on the product,
      then the buyer can finalize the deal by accepting the product as is. When
      copying to a proposal, if any of the terms are changed, then auto_finalize
      is automatically set to false.
    productId: The unique ID for the product.
    productRevision: The revision number of the product (auto-assigned by
      Marketplace).
    publisherProfileId: An ID which can be used by the Publisher Profile API to
      get more information about the seller that created this product.
    seller: Information about the seller that created this product.
    syndicationProduct: The syndication product associated with the deal.
    targetingCriterion: Targeting that is shared between the buyer and the
      seller. Each targeting criterion has a specified key and for each key
      there is a list of inclusion value or exclusion values.
    terms: The negotiable terms of the deal.
    updateTime: Time of last update.
    webPropertyCode: The web-property code for the seller. This needs to be
      copied as is when adding a new deal to a proposal.
  """

  class SyndicationProductValueValuesEnum(_messages.Enum):
    r"""The syndication product associated with the deal.

    Values:
      SYNDICATION_PRODUCT_UNSPECIFIED: <no description>
      CONTENT: <no description>
      MOBILE: <no description>
      VIDEO: <no description>
      GAMES: <no description>
    """
    SYNDICATION_PRODUCT_UNSPECIFIED = 0
    CONTENT = 1
    MOBILE = 2
    VIDEO = 3
    GAMES = 4

  availableEndTime = _message_types.DateTimeField(1)
  availableStartTime = _message_types.DateTimeField(2)
  createTime = _message_types.DateTimeField(3)
  creatorContacts = _messages.MessageField('ContactInformation', 4, repeated=True)
  displayName = _messages.StringField(5)
  hasCreatorSignedOff = _messages.BooleanField(6)
  productId = _messages.StringField(7)
  productRevision = _messages.IntegerField(8, variant=_messages.Variant.INT64)
  publisherProfileId = _messages.StringField(9)
  seller = _messages.MessageField('Seller', 10)
  syndicationProduct = _messages.EnumField('SyndicationProductValueValuesEnum', 11)
  targetingCriterion = _messages.MessageField('TargetingCriteria', 12, repeated=True)
  terms = _messages.MessageField('DealTerms', 13)
  updateTime = _message_types.DateTimeField(14)
  webPropertyCode = _messages.StringField(15)


class Proposal(_messages.Message):
  r"""Represents a proposal in the Marketplace. A proposal is the unit of
  negotiation between a seller and a buyer and contains deals which are served.
  Note: You can't update, create, or otherwise modify Private Auction deals
  through the API. Fields are updatable unless noted otherwise.

  Enums:
    LastUpdaterOrCommentorRoleValueValuesEnum: Output only. The role of the last
      user that either updated the proposal or left a comment.
    OriginatorRoleValueValuesEnum: Output only. Indicates whether the
      buyer/seller created the proposal.
    ProposalStateValueValuesEnum: Output only. The current state of the
      proposal.

  Fields:
    billedBuyer: Output only. Reference to the buyer that will get billed for
      this proposal.
    buyer: Reference to the buyer on the proposal. Note: This field may be set
      only when creating the resource. Modifying this field while updating the
      resource will result in an error.
    buyerContacts: Contact information for the buyer.
    buyerPrivateData: Private data for buyer. (hidden from seller).
    deals: The deals associated with this proposal. For Private Auction
      proposals (whose deals have NonGuaranteedAuctionTerms), there will only be
      one deal.
    displayName: The name for the proposal.
    isRenegotiating: Output only. True if the proposal is being renegotiated.
    isSetupComplete: Output only. True, if the buyside inventory setup is
      complete for this proposal.
    lastUpdaterOrCommentorRole: Output only. The role of the last user that
      either updated the proposal or left a comment.
    notes: Output only. The notes associated with this proposal.
    originatorRole: Output only. Indicates whether the buyer/seller created the
      proposal.
    privateAuctionId: Output only. Private auction ID if this proposal is a
      private auction proposal.
    proposalId: Output only. The unique ID of the proposal.
    proposalRevision: Output only. The revision number for the proposal. Each
      update to the proposal or the deal causes the proposal revision number to
      auto-increment. The buyer keeps track of the last revision number they
      know of and pass it in when making an update. If the head revision number
      on the server has since incremented, then an ABORTED error is returned
      during the update operation to let the buyer know that a subsequent update
      was made.
    proposalState: Output only. The current state of the proposal.
    seller: Reference to the seller on the proposal. Note: This field may be set
      only when creating the resource. Modifying this field while updating the
      resource will result in an error.
    sellerContacts: Output only. Contact information for the seller.
    termsAndConditions: Output only. The terms and conditions set by the
      publisher for this proposal.
    updateTime: Output only. The time when the proposal was last revised.
  """

  class LastUpdaterOrCommentorRoleValueValuesEnum(_messages.Enum):
    r"""Output only. The role of the last user that either updated the proposal
    or left a comment.

    Values:
      BUYER_SELLER_ROLE_UNSPECIFIED: <no description>
      BUYER: <no description>
      SELLER: <no description>
    """
    BUYER_SELLER_ROLE_UNSPECIFIED = 0
    BUYER = 1
    SELLER = 2

  class OriginatorRoleValueValuesEnum(_messages.Enum):
    r"""Output only. Indicates whether the buyer/seller created the proposal.

    Values:
      BUYER_SELLER_ROLE_UNSPECIFIED: <no description>
      BUYER: <no description>
      SELLER: <no description>
    """
    BUYER_SELLER_ROLE_UNSPECIFIED = 0
    BUYER = 1
    SELLER = 2

  class ProposalStateValueValuesEnum(_messages.Enum):
    r"""Output only. The current state of the proposal.

    Values:
      PROPOSAL_STATE_UNSPECIFIED: <no description>
      PROPOSED: <no description>
      BUYER_ACCEPTED: <no description>
      SELLER_ACCEPTED: <no description>
      CANCELED: <no description>
      FINALIZED: <no description>
    """
    PROPOSAL_STATE_UNSPECIFIED = 0
    PROPOSED = 1
    BUYER_ACCEPTED = 2
    SELLER_ACCEPTED = 3
    CANCELED = 4
    FINALIZED = 5

  billedBuyer = _messages.MessageField('Buyer', 1)
  buyer = _messages.MessageField('Buyer', 2)
  buyerContacts = _messages.MessageField('ContactInformation', 3, repeated=True)
  buyerPrivateData = _messages.MessageField('PrivateData', 4)
  deals = _messages.MessageField('Deal', 5, repeated=True)
  displayName = _messages.StringField(6)
  isRenegotiating = _messages.BooleanField(7)
  isSetupComplete = _messages.BooleanField(8)
  lastUpdaterOrCommentorRole = _messages.EnumField('LastUpdaterOrCommentorRoleValueValuesEnum', 9)
  notes = _messages.MessageField('Note', 10, repeated=True)
  originatorRole = _messages.EnumField('OriginatorRoleValueValuesEnum', 11)
  privateAuctionId = _messages.StringField(12)
  proposalId = _messages.StringField(13)
  proposalRevision = _messages.IntegerField(14, variant=_messages.Variant.INT64)
  proposalState = _messages.EnumField('ProposalStateValueValuesEnum', 15)
  seller = _messages.MessageField('Seller', 16)
  sellerContacts = _messages.MessageField('ContactInformation', 17, repeated=True)
  termsAndConditions = _messages.StringField(18)
  updateTime = _message_types.DateTimeField(19)


class PublisherProfile(_messages.Message):
  r"""Represents a publisher profile
  (https://support.google.com/admanager/answer/6035806) in Marketplace. All
  fields are read only. All string fields are free-form text entered by the
  publisher unless noted otherwise.

  Fields:
    audienceDescription: Description on the publisher's audience.
    buyerPitchStatement: Statement explaining what's unique about publisher's
      business, and why buyers should partner with the publisher.
    directDealsContact: Contact information for direct reservation deals. This
      is free text entered by the publisher and may include information like
      names, phone numbers and email addresses.
    displayName: Name of the publisher profile.
    domains: The list of domains represented in this publisher profile. Empty if
      this is a parent profile. These are top private domains, meaning that
      these will not contain a string like "photos.google.co.uk/123", but will
      instead contain "google.co.uk".
    googlePlusUrl: URL to publisher's Google+ page.
    isParent: Indicates if this profile is the parent profile of the seller. A
      parent profile represents all the inventory from the seller, as opposed to
      child profile that is created to brand a portion of inventory. One seller
      should have only one parent publisher profile, and can have multiple child
      profiles. Publisher profiles for the same seller will have same value of
      field google.ads.adexchange.buyer.v2beta1.PublisherProfile.seller. See
      https://support.google.com/admanager/answer/6035806 for details.
    logoUrl: A Google public URL to the logo for this publisher profile. The
      logo is stored as a PNG, JPG, or GIF image.
    mediaKitUrl: URL to additional marketing and sales materials.
    mobileApps: The list of apps represented in this publisher profile. Empty if
      this is a parent profile.
    overview: Overview of the publisher.
    programmaticDealsContact: Contact information for programmatic deals. This
      is free text entered by the publisher and may include information like
      names, phone numbers and email addresses.
    publisherProfileId: Unique ID for publisher profile.
    rateCardInfoUrl: URL to a publisher rate card.
    samplePageUrl: URL to a sample content page.
    seller: Seller of the publisher profile.
    topHeadlines: Up to three key metrics and rankings. Max 100 characters each.
      For example "#1 Mobile News Site for 20 Straight Months".
  """

  audienceDescription = _messages.StringField(1)
  buyerPitchStatement = _messages.StringField(2)
  directDealsContact = _messages.StringField(3)
  displayName = _messages.StringField(4)
  domains = _messages.StringField(5, repeated=True)
  googlePlusUrl = _messages.StringField(6)
  isParent = _messages.BooleanField(7)
  logoUrl = _messages.StringField(8)
  mediaKitUrl = _messages.StringField(9)
  mobileApps = _messages.MessageField('PublisherProfileMobileApplication', 10, repeated=True)
  overview = _messages.StringField(11)
  programmaticDealsContact = _messages.StringField(12)
  publisherProfileId = _messages.StringField(13)
  rateCardInfoUrl = _messages.StringField(14)
  samplePageUrl = _messages.StringField(15)
  seller = _messages.MessageField('Seller', 16)
  topHeadlines = _messages.StringField(17, repeated=True)


class PublisherProfileMobileApplication(_messages.Message):
  r"""A mobile application that contains a external app ID, name, and app store.

  Enums:
    AppStoreValueValuesEnum: The app store the app belongs to.

  Fields:
    appStore: The app store the app belongs to.
    externalAppId: The external ID for the app from its app store.
    name: The name of the app.
  """

  class AppStoreValueValuesEnum(_messages.Enum):
    r"""The app store the app belongs to.

    Values:
      APP_STORE_TYPE_UNSPECIFIED: <no description>
      APPLE_ITUNES: <no description>
      GOOGLE_PLAY: <no description>
      ROKU: <no description>
      AMAZON_FIRETV: <no description>
      PLAYSTATION: <no description>
      XBOX: <no description>
      SAMSUNG_TV: <no description>
      AMAZON: <no description>
      OPPO: <no description>
      SAMSUNG: <no description>
      VIVO: <no description>
      XIAOMI: <no description>
    """
    APP_STORE_TYPE_UNSPECIFIED = 0
    APPLE_ITUNES = 1
    GOOGLE_PLAY = 2
    ROKU = 3
    AMAZON_FIRETV = 4
    PLAYSTATION = 5
    XBOX = 6
    SAMSUNG_TV = 7
    AMAZON = 8
    OPPO = 9
    SAMSUNG = 10
    VIVO = 11
    XIAOMI = 12

  appStore = _messages.EnumField('AppStoreValueValuesEnum', 1)
  externalAppId = _messages.StringField(2)
  name = _messages.StringField(3)


class RealtimeTimeRange(_messages.Message):
  r"""An open-ended realtime time range specified by the start timestamp. For
  filter sets that specify a realtime time range RTB metrics continue to be
  aggregated throughout the lifetime of the filter set.

  Fields:
    startTimestamp: The start timestamp of the real-time RTB metrics
      aggregation.
  """

  startTimestamp = _message_types.DateTimeField(1)


class RelativeDateRange(_messages.Message):
  r"""A relative date range, specified by an offset and a duration. The
  supported range of dates begins 30 days before today and ends today, for
  example, the limits for these values are: offset_days >= 0 duration_days >= 1
  offset_days + duration_days <= 30

  Fields:
    durationDays: The number of days in the requested date range, for example,
      for a range spanning today: 1. For a range spanning the last 7 days: 7.
    offsetDays: The end date of the filter set, specified as the number of days
      before today, for example, for a range where the last date is today: 0.
  """

  durationDays = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  offsetDays = _messages.IntegerField(2, variant=_messages.Variant.INT32)


class RemoveDealAssociationRequest(_messages.Message):
  r"""A request for removing the association between a deal and a creative.

  Fields:
    association: The association between a creative and a deal that should be
      removed.
  """

  association = _messages.MessageField('CreativeDealAssociation', 1)


class ResumeProposalDealsRequest(_messages.Message):
  r"""Request message to resume (unpause) serving for already-finalized deals.

  Fields:
    externalDealIds: The external_deal_id's of the deals to resume. If empty,
      all the deals in the proposal will be resumed.
  """

  externalDealIds = _messages.StringField(1, repeated=True)


class ResumeProposalRequest(_messages.Message):
  r"""Request message to resume (unpause) serving for an already-finalized
  proposal.
  """


class RowDimensions(_messages.Message):
  r"""A response may include multiple rows, breaking down along various
  dimensions. Encapsulates the values of all dimensions for a given row.

  Fields:
    publisherIdentifier: The publisher identifier for this row, if a breakdown
      by
      [BreakdownDimension.PUBLISHER_IDENTIFIER](https://developers.google.com/authorized-buyers/apis/reference/rest/v2beta1/bidders.accounts.filterSets#FilterSet.BreakdownDimension)
      was requested.
    timeInterval: The time interval that this row represents.
  """

  publisherIdentifier = _messages.StringField(1)
  timeInterval = _messages.MessageField('TimeInterval', 2)


class SecurityContext(_messages.Message):
  r"""Output only. A security context.

  Enums:
    SecuritiesValueListEntryValuesEnum: A SecuritiesValueListEntryValuesEnum
      object.

  Fields:
    securities: The security types in this context.
  """

  class SecuritiesValueListEntryValuesEnum(_messages.Enum):
    r"""A SecuritiesValueListEntryValuesEnum object.

    Values:
      INSECURE: <no description>
      SSL: <no description>
    """
    INSECURE = 0
    SSL = 1

  securities = _messages.EnumField('SecuritiesValueListEntryValuesEnum', 1, repeated=True)


class Seller(_messages.Message):
  r"""Represents a seller of inventory. Each seller is identified by a unique Ad
  Manager account ID.

  Fields:
    accountId: The unique ID for the seller. The seller fills in this field. The
      seller account ID is then available to buyer in the product.
    subAccountId: Output only. Ad manager network code for the seller.
  """

  accountId = _messages.StringField(1)
  subAccountId = _messages.StringField(2)


class ServingContext(_messages.Message):
  r"""The serving context for this restriction.

  Enums:
    AllValueValuesEnum: Matches all contexts.

  Fields:
    all: Matches all contexts.
    appType: Matches impressions for a particular app type.
    auctionType: Matches impressions for a particular auction type.
    location: Matches impressions coming from users *or* publishers in a
      specific location.
    platform: Matches impressions coming from a particular platform.
    securityType: Matches impressions for a particular security type.
  """

  class AllValueValuesEnum(_messages.Enum):
    r"""Matches all contexts.

    Values:
      SIMPLE_CONTEXT: <no description>
    """
    SIMPLE_CONTEXT = 0

  all = _messages.EnumField('AllValueValuesEnum', 1)
  appType = _messages.MessageField('AppContext', 2)
  auctionType = _messages.MessageField('AuctionContext', 3)
  location = _messages.MessageField('LocationContext', 4)
  platform = _messages.MessageField('PlatformContext', 5)
  securityType = _messages.MessageField('SecurityContext', 6)


class ServingRestriction(_messages.Message):
  r"""Output only. A representation of the status of an ad in a specific
  context. A context here relates to where something ultimately serves (for
  example, a user or publisher geo, a platform, an HTTPS versus HTTP request, or
  the type of auction).

  Enums:
    StatusValueValuesEnum: The status of the creative in this context (for
      example, it has been explicitly disapproved or is pending review).

  Fields:
    contexts: The contexts for the restriction.
    disapproval: Disapproval bound to this restriction. Only present if
      status=DISAPPROVED. Can be used to filter the response of the
      creatives.list method.
    disapprovalReasons: Any disapprovals bound to this restriction. Only present
      if status=DISAPPROVED. Can be used to filter the response of the
      creatives.list method. Deprecated; use disapproval field instead.
    status: The status of the creative in this context (for example, it has been
      explicitly disapproved or is pending review).
  """

  class StatusValueValuesEnum(_messages.Enum):
    r"""The status of the creative in this context (for example, it has been
    explicitly disapproved or is pending review).

    Values:
      STATUS_UNSPECIFIED: <no description>
      DISAPPROVAL: <no description>
      PENDING_REVIEW: <no description>
    """
    STATUS_UNSPECIFIED = 0
    DISAPPROVAL = 1
    PENDING_REVIEW = 2

  contexts = _messages.MessageField('ServingContext', 1, repeated=True)
  disapproval = _messages.MessageField('Disapproval', 2)
  disapprovalReasons = _messages.MessageField('Disapproval', 3, repeated=True)
  status = _messages.EnumField('StatusValueValuesEnum', 4)


class Size(_messages.Message):
  r"""Message depicting the size of the creative. The units of width and height
  depend on the type of the targeting.

  Fields:
    height: The height of the creative.
    width: The width of the creative
  """

  height = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  width = _messages.IntegerField(2, variant=_messages.Variant.INT32)


class StopWatchingCreativeRequest(_messages.Message):
  r"""A request for stopping notifications for changes to creative Status."""


class TargetingCriteria(_messages.Message):
  r"""Advertisers can target different attributes of an ad slot. For example,
  they can choose to show ads only if the user is in the U.S. Such targeting
  criteria can be specified as part of Shared Targeting.

  Fields:
    exclusions: The list of values to exclude from targeting. Each value is
      AND'd together.
    inclusions: The list of value to include as part of the targeting. Each
      value is OR'd together.
    key: The key representing the shared targeting criterion. Targeting criteria
      defined by Google ad servers will begin with GOOG_. Third parties may
      define their own keys. A list of permissible keys along with the
      acceptable values will be provided as part of the external documentation.
  """

  exclusions = _messages.MessageField('TargetingValue', 1, repeated=True)
  inclusions = _messages.MessageField('TargetingValue', 2, repeated=True)
  key = _messages.StringField(3)


class TargetingValue(_messages.Message):
  r"""A polymorphic targeting value used as part of Shared Targeting.

  Fields:
    creativeSizeValue: The creative size value to include/exclude. Filled in
      when key = GOOG_CREATIVE_SIZE
    dayPartTargetingValue: The daypart targeting to include / exclude. Filled in
      when the key is GOOG_DAYPART_TARGETING. The definition of this targeting
      is derived from the structure used by Ad Manager.
    longValue: The long value to include/exclude.
    stringValue: The string value to include/exclude.
  """

  creativeSizeValue = _messages.MessageField('CreativeSize', 1)
  dayPartTargetingValue = _messages.MessageField('DayPartTargeting', 2)
  longValue = _messages.IntegerField(3, variant=_messages.Variant.INT64)
  stringValue = _messages.StringField(4)


class TechnologyTargeting(_messages.Message):
  r"""Represents targeting about various types of technology.

  Fields:
    deviceCapabilityTargeting: IDs of device capabilities to be
      included/excluded.
    deviceCategoryTargeting: IDs of device categories to be included/excluded.
    operatingSystemTargeting: Operating system related targeting information.
  """

  deviceCapabilityTargeting = _messages.MessageField('CriteriaTargeting', 1)
  deviceCategoryTargeting = _messages.MessageField('CriteriaTargeting', 2)
  operatingSystemTargeting = _messages.MessageField('OperatingSystemTargeting', 3)


class TimeInterval(_messages.Message):
  r"""An interval of time, with an absolute start and end.

  Fields:
    endTime: The timestamp marking the end of the range (exclusive) for which
      data is included.
    startTime: The timestamp marking the start of the range (inclusive) for
      which data is included.
  """

  endTime = _message_types.DateTimeField(1)
  startTime = _message_types.DateTimeField(2)


class TimeOfDay(_messages.Message):
  r"""Represents a time of day. The date and time zone are either not
  significant or are specified elsewhere. An API may choose to allow leap
  seconds. Related types are google.type.Date and `google.protobuf.Timestamp`.

  Fields:
    hours: Hours of day in 24 hour format. Should be from 0 to 23. An API may
      choose to allow the value "24:00:00" for scenarios like business closing
      time.
    minutes: Minutes of hour of day. Must be from 0 to 59.
    nanos: Fractions of seconds in nanoseconds. Must be from 0 to 999,999,999.
    seconds: Seconds of minutes of the time. Must normally be from 0 to 59. An
      API may allow the value 60 if it allows leap-seconds.
  """

  hours = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  minutes = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  nanos = _messages.IntegerField(3, variant=_messages.Variant.INT32)
  seconds = _messages.IntegerField(4, variant=_messages.Variant.INT32)


class UrlTargeting(_messages.Message):
  r"""Represents a list of targeted and excluded URLs (for example, google.com).
  For Private Auction and AdX Preferred Deals, URLs are either included or
  excluded. For Programmatic Guaranteed and Preferred Deals, this doesn't apply.

  Fields:
    excludedUrls: A list of URLs to be excluded.
    targetedUrls: A list of URLs to be included.
  """

  excludedUrls = _messages.StringField(1, repeated=True)
  targetedUrls = _messages.StringField(2, repeated=True)


class VideoContent(_messages.Message):
  r"""Video content for a creative.

  Fields:
    videoUrl: The URL to fetch a video ad.
    videoVastXml: The contents of a VAST document for a video ad. This document
      should conform to the VAST 2.0 or 3.0 standard.
  """

  videoUrl = _messages.StringField(1)
  videoVastXml = _messages.StringField(2)


class VideoTargeting(_messages.Message):
  r"""Represents targeting information about video.

  Enums:
    ExcludedPositionTypesValueListEntryValuesEnum: A
      ExcludedPositionTypesValueListEntryValuesEnum object.
    TargetedPositionTypesValueListEntryValuesEnum: A
      TargetedPositionTypesValueListEntryValuesEnum object.

  Fields:
    excludedPositionTypes: A list of video positions to be excluded. Position
      types can either be included or excluded (XOR).
    targetedPositionTypes: A list of video positions to be included. When the
      included list is present, the excluded list must be empty. When the
      excluded list is present, the included list must be empty.
  """

  class ExcludedPositionTypesValueListEntryValuesEnum(_messages.Enum):
    r"""A ExcludedPositionTypesValueListEntryValuesEnum object.

    Values:
      POSITION_TYPE_UNSPECIFIED: <no description>
      PREROLL: <no description>
      MIDROLL: <no description>
      POSTROLL: <no description>
    """
    POSITION_TYPE_UNSPECIFIED = 0
    PREROLL = 1
    MIDROLL = 2
    POSTROLL = 3

  class TargetedPositionTypesValueListEntryValuesEnum(_messages.Enum):
    r"""A TargetedPositionTypesValueListEntryValuesEnum object.

    Values:
      POSITION_TYPE_UNSPECIFIED: <no description>
      PREROLL: <no description>
      MIDROLL: <no description>
      POSTROLL: <no description>
    """
    POSITION_TYPE_UNSPECIFIED = 0
    PREROLL = 1
    MIDROLL = 2
    POSTROLL = 3

  excludedPositionTypes = _messages.EnumField('ExcludedPositionTypesValueListEntryValuesEnum', 1, repeated=True)
  targetedPositionTypes = _messages.EnumField('TargetedPositionTypesValueListEntryValuesEnum', 2, repeated=True)


class WatchCreativeRequest(_messages.Message):
  r"""A request for watching changes to creative Status.

  Fields:
    topic: The Pub/Sub topic to publish notifications to. This topic must
      already exist and must give permission to
      ad-exchange-buyside-reports@google.com to write to the topic. This should
      be the full resource name in "projects/{project_id}/topics/{topic_id}"
      format.
  """

  topic = _messages.StringField(1)
