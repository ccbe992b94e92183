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
"""Generated client library for adexchangebuyer2 version v2beta1."""
# NOTE: This file is autogenerated and should not be edited by hand.

from gapis.api_lib.util import base_api
from gapis.generated_clients.apis.adexchangebuyer2.v2beta1 import adexchangebuyer2_v2beta1_messages as messages


class Adexchangebuyer2V2beta1(base_api.BaseApiClient):
  """Generated client library for service adexchangebuyer2 version v2beta1."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://adexchangebuyer.googleapis.com/'
  MTLS_BASE_URL = 'https://adexchangebuyer.mtls.googleapis.com/'

  _PACKAGE = 'adexchangebuyer2'
  _SCOPES = ['https://www.googleapis.com/auth/adexchange.buyer']
  _VERSION = 'v2beta1'
  _CLIENT_CLASS_NAME = 'Adexchangebuyer2V2beta1'

  def __init__(self, url='', credentials=None, get_credentials=True,
               session=None, additional_http_headers=None,
               default_global_params=None, check_response_func=None):
    """Create a new adexchangebuyer2 handle."""
    url = url or self.BASE_URL
    super(Adexchangebuyer2V2beta1, self).__init__(
        url, credentials=credentials, get_credentials=get_credentials,
        session=session, additional_http_headers=additional_http_headers,
        default_global_params=default_global_params,
        check_response_func=check_response_func)
    self._method_configs = {
        'AccountsClientsCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.create',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/clients',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=[],
            request_type_name='Client',
            response_type_name='Client',
        ),
        'AccountsClientsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}',
            ordered_params=['accountId', 'clientAccountId'],
            path_params=['accountId', 'clientAccountId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Client',
        ),
        'AccountsClientsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['pageSize', 'pageToken', 'partnerClientId'],
            request_type_name=None,
            response_type_name='ListClientsResponse',
        ),
        'AccountsClientsUpdate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.update',
            http_method='PUT',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}',
            ordered_params=['accountId', 'clientAccountId'],
            path_params=['accountId', 'clientAccountId'],
            query_params=[],
            request_type_name='Client',
            response_type_name='Client',
        ),
        'AccountsClientsInvitationsCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.invitations.create',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/invitations',
            ordered_params=['accountId', 'clientAccountId'],
            path_params=['accountId', 'clientAccountId'],
            query_params=[],
            request_type_name='ClientUserInvitation',
            response_type_name='ClientUserInvitation',
        ),
        'AccountsClientsInvitationsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.invitations.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/invitations/{invitationId}',
            ordered_params=['accountId', 'clientAccountId', 'invitationId'],
            path_params=['accountId', 'clientAccountId', 'invitationId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ClientUserInvitation',
        ),
        'AccountsClientsInvitationsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.invitations.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/invitations',
            ordered_params=['accountId', 'clientAccountId'],
            path_params=['accountId', 'clientAccountId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListClientUserInvitationsResponse',
        ),
        'AccountsClientsUsersGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.users.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/users/{userId}',
            ordered_params=['accountId', 'clientAccountId', 'userId'],
            path_params=['accountId', 'clientAccountId', 'userId'],
            query_params=[],
            request_type_name=None,
            response_type_name='ClientUser',
        ),
        'AccountsClientsUsersList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.users.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/users',
            ordered_params=['accountId', 'clientAccountId'],
            path_params=['accountId', 'clientAccountId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListClientUsersResponse',
        ),
        'AccountsClientsUsersUpdate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.clients.users.update',
            http_method='PUT',
            relative_path='v2beta1/accounts/{accountId}/clients/{clientAccountId}/users/{userId}',
            ordered_params=['accountId', 'clientAccountId', 'userId'],
            path_params=['accountId', 'clientAccountId', 'userId'],
            query_params=[],
            request_type_name='ClientUser',
            response_type_name='ClientUser',
        ),
        'AccountsCreativesCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.create',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/creatives',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['duplicateIdMode'],
            request_type_name='Creative',
            response_type_name='Creative',
        ),
        'AccountsCreativesGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Creative',
        ),
        'AccountsCreativesList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/creatives',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['pageSize', 'pageToken', 'query'],
            request_type_name=None,
            response_type_name='ListCreativesResponse',
        ),
        'AccountsCreativesStopWatching': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.stopWatching',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}:stopWatching',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name='StopWatchingCreativeRequest',
            response_type_name='Empty',
        ),
        'AccountsCreativesUpdate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.update',
            http_method='PUT',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name='Creative',
            response_type_name='Creative',
        ),
        'AccountsCreativesWatch': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.watch',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}:watch',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name='WatchCreativeRequest',
            response_type_name='Empty',
        ),
        'AccountsCreativesDealAssociationsAdd': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.dealAssociations.add',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}/dealAssociations:add',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name='AddDealAssociationRequest',
            response_type_name='Empty',
        ),
        'AccountsCreativesDealAssociationsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.dealAssociations.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}/dealAssociations',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=['pageSize', 'pageToken', 'query'],
            request_type_name=None,
            response_type_name='ListDealAssociationsResponse',
        ),
        'AccountsCreativesDealAssociationsRemove': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.creatives.dealAssociations.remove',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/creatives/{creativeId}/dealAssociations:remove',
            ordered_params=['accountId', 'creativeId'],
            path_params=['accountId', 'creativeId'],
            query_params=[],
            request_type_name='RemoveDealAssociationRequest',
            response_type_name='Empty',
        ),
        'AccountsFinalizedProposalsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.finalizedProposals.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/finalizedProposals',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['filter', 'filterSyntax', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListProposalsResponse',
        ),
        'AccountsFinalizedProposalsPause': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.finalizedProposals.pause',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/finalizedProposals/{proposalId}:pause',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='PauseProposalDealsRequest',
            response_type_name='Proposal',
        ),
        'AccountsFinalizedProposalsResume': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.finalizedProposals.resume',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/finalizedProposals/{proposalId}:resume',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='ResumeProposalDealsRequest',
            response_type_name='Proposal',
        ),
        'AccountsProductsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.products.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/products/{productId}',
            ordered_params=['accountId', 'productId'],
            path_params=['accountId', 'productId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Product',
        ),
        'AccountsProductsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.products.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/products',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['filter', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListProductsResponse',
        ),
        'AccountsProposalsAccept': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.accept',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:accept',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='AcceptProposalRequest',
            response_type_name='Proposal',
        ),
        'AccountsProposalsAddNote': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.addNote',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:addNote',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='AddNoteRequest',
            response_type_name='Note',
        ),
        'AccountsProposalsCancelNegotiation': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.cancelNegotiation',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:cancelNegotiation',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='CancelNegotiationRequest',
            response_type_name='Proposal',
        ),
        'AccountsProposalsCompleteSetup': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.completeSetup',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:completeSetup',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='CompleteSetupRequest',
            response_type_name='Proposal',
        ),
        'AccountsProposalsCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.create',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=[],
            request_type_name='Proposal',
            response_type_name='Proposal',
        ),
        'AccountsProposalsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name=None,
            response_type_name='Proposal',
        ),
        'AccountsProposalsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/proposals',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['filter', 'filterSyntax', 'pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListProposalsResponse',
        ),
        'AccountsProposalsPause': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.pause',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:pause',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='PauseProposalRequest',
            response_type_name='Proposal',
        ),
        'AccountsProposalsResume': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.resume',
            http_method='POST',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}:resume',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='ResumeProposalRequest',
            response_type_name='Proposal',
        ),
        'AccountsProposalsUpdate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.proposals.update',
            http_method='PUT',
            relative_path='v2beta1/accounts/{accountId}/proposals/{proposalId}',
            ordered_params=['accountId', 'proposalId'],
            path_params=['accountId', 'proposalId'],
            query_params=[],
            request_type_name='Proposal',
            response_type_name='Proposal',
        ),
        'AccountsPublisherProfilesGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.publisherProfiles.get',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/publisherProfiles/{publisherProfileId}',
            ordered_params=['accountId', 'publisherProfileId'],
            path_params=['accountId', 'publisherProfileId'],
            query_params=[],
            request_type_name=None,
            response_type_name='PublisherProfile',
        ),
        'AccountsPublisherProfilesList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.accounts.publisherProfiles.list',
            http_method='GET',
            relative_path='v2beta1/accounts/{accountId}/publisherProfiles',
            ordered_params=['accountId'],
            path_params=['accountId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListPublisherProfilesResponse',
        ),
        'BiddersAccountsFilterSetsCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.create',
            http_method='POST',
            relative_path='v2beta1/{+ownerName}/filterSets',
            ordered_params=['ownerName'],
            path_params=['ownerName'],
            query_params=['isTransient'],
            request_type_name='FilterSet',
            response_type_name='FilterSet',
        ),
        'BiddersAccountsFilterSetsDelete': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.delete',
            http_method='DELETE',
            relative_path='v2beta1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Empty',
        ),
        'BiddersAccountsFilterSetsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.get',
            http_method='GET',
            relative_path='v2beta1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='FilterSet',
        ),
        'BiddersAccountsFilterSetsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.list',
            http_method='GET',
            relative_path='v2beta1/{+ownerName}/filterSets',
            ordered_params=['ownerName'],
            path_params=['ownerName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilterSetsResponse',
        ),
        'BiddersAccountsFilterSetsBidMetricsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.bidMetrics.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidMetrics',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidMetricsResponse',
        ),
        'BiddersAccountsFilterSetsBidResponseErrorsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.bidResponseErrors.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidResponseErrors',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidResponseErrorsResponse',
        ),
        'BiddersAccountsFilterSetsBidResponsesWithoutBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.bidResponsesWithoutBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidResponsesWithoutBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidResponsesWithoutBidsResponse',
        ),
        'BiddersAccountsFilterSetsFilteredBidRequestsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.filteredBidRequests.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBidRequests',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilteredBidRequestsResponse',
        ),
        'BiddersAccountsFilterSetsFilteredBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.filteredBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilteredBidsResponse',
        ),
        'BiddersAccountsFilterSetsFilteredBidsCreativesList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.filteredBids.creatives.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids/{creativeStatusId}/creatives',
            ordered_params=['filterSetName', 'creativeStatusId'],
            path_params=['filterSetName', 'creativeStatusId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCreativeStatusBreakdownByCreativeResponse',
        ),
        'BiddersAccountsFilterSetsFilteredBidsDetailsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.filteredBids.details.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids/{creativeStatusId}/details',
            ordered_params=['filterSetName', 'creativeStatusId'],
            path_params=['filterSetName', 'creativeStatusId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCreativeStatusBreakdownByDetailResponse',
        ),
        'BiddersAccountsFilterSetsImpressionMetricsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.impressionMetrics.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/impressionMetrics',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListImpressionMetricsResponse',
        ),
        'BiddersAccountsFilterSetsLosingBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.losingBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/losingBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListLosingBidsResponse',
        ),
        'BiddersAccountsFilterSetsNonBillableWinningBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.accounts.filterSets.nonBillableWinningBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/nonBillableWinningBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListNonBillableWinningBidsResponse',
        ),
        'BiddersFilterSetsCreate': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.create',
            http_method='POST',
            relative_path='v2beta1/{+ownerName}/filterSets',
            ordered_params=['ownerName'],
            path_params=['ownerName'],
            query_params=['isTransient'],
            request_type_name='FilterSet',
            response_type_name='FilterSet',
        ),
        'BiddersFilterSetsDelete': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.delete',
            http_method='DELETE',
            relative_path='v2beta1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='Empty',
        ),
        'BiddersFilterSetsGet': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.get',
            http_method='GET',
            relative_path='v2beta1/{+name}',
            ordered_params=['name'],
            path_params=['name'],
            query_params=[],
            request_type_name=None,
            response_type_name='FilterSet',
        ),
        'BiddersFilterSetsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.list',
            http_method='GET',
            relative_path='v2beta1/{+ownerName}/filterSets',
            ordered_params=['ownerName'],
            path_params=['ownerName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilterSetsResponse',
        ),
        'BiddersFilterSetsBidMetricsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.bidMetrics.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidMetrics',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidMetricsResponse',
        ),
        'BiddersFilterSetsBidResponseErrorsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.bidResponseErrors.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidResponseErrors',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidResponseErrorsResponse',
        ),
        'BiddersFilterSetsBidResponsesWithoutBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.bidResponsesWithoutBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/bidResponsesWithoutBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListBidResponsesWithoutBidsResponse',
        ),
        'BiddersFilterSetsFilteredBidRequestsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.filteredBidRequests.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBidRequests',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilteredBidRequestsResponse',
        ),
        'BiddersFilterSetsFilteredBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.filteredBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListFilteredBidsResponse',
        ),
        'BiddersFilterSetsFilteredBidsCreativesList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.filteredBids.creatives.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids/{creativeStatusId}/creatives',
            ordered_params=['filterSetName', 'creativeStatusId'],
            path_params=['filterSetName', 'creativeStatusId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCreativeStatusBreakdownByCreativeResponse',
        ),
        'BiddersFilterSetsFilteredBidsDetailsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.filteredBids.details.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/filteredBids/{creativeStatusId}/details',
            ordered_params=['filterSetName', 'creativeStatusId'],
            path_params=['filterSetName', 'creativeStatusId'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListCreativeStatusBreakdownByDetailResponse',
        ),
        'BiddersFilterSetsImpressionMetricsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.impressionMetrics.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/impressionMetrics',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListImpressionMetricsResponse',
        ),
        'BiddersFilterSetsLosingBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.losingBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/losingBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListLosingBidsResponse',
        ),
        'BiddersFilterSetsNonBillableWinningBidsList': base_api.ApiMethodInfo(
            method_id='adexchangebuyer2.bidders.filterSets.nonBillableWinningBids.list',
            http_method='GET',
            relative_path='v2beta1/{+filterSetName}/nonBillableWinningBids',
            ordered_params=['filterSetName'],
            path_params=['filterSetName'],
            query_params=['pageSize', 'pageToken'],
            request_type_name=None,
            response_type_name='ListNonBillableWinningBidsResponse',
        ),
    }

  def AccountsClientsCreate(self, accountId, request):
    r"""Creates a new client buyer.

    Args:
      accountId: (int) Unique numerical account ID for the buyer of which the
        client buyer is a customer; the sponsor buyer to create a client for.
        (required)
      request: (Client) A client resource represents a client buyeran agency, a
        brand, or an advertiser customer of the sponsor buyer. Users associated
        with the client buyer have restricted access to the Marketplace and
        certain other sections of the Authorized Buyers UI based on the role
        granted to the client buyer. All fields are required unless otherwise
        specified.

    Returns:
      (Client) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsCreate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        request=request,
    )

  def AccountsClientsGet(self, accountId, clientAccountId):
    r"""Gets a client buyer with a given client account ID.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (int) Numerical account ID of the client buyer to
        retrieve. (required)

    Returns:
      (Client) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
        },
    )

  def AccountsClientsList(
      self, accountId, pageSize=None, pageToken=None, partnerClientId=None):
    r"""Lists all the clients for the current sponsor buyer.

    Args:
      accountId: (int) Unique numerical account ID of the sponsor buyer to list
        the clients for.
      pageSize: (int) Requested page size. The server may return fewer clients
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListClientsResponse.nextPageToken returned from the previous call to the
        accounts.clients.list method.
      partnerClientId: (str) Optional unique identifier (from the standpoint of
        an Ad Exchange sponsor buyer partner) of the client to return. If
        specified, at most one client will be returned in the response.

    Returns:
      (ListClientsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
            'partnerClientId': partnerClientId,
        },
    )

  def AccountsClientsUpdate(self, accountId, clientAccountId, request):
    r"""Updates an existing client buyer.

    Args:
      accountId: (int) Unique numerical account ID for the buyer of which the
        client buyer is a customer; the sponsor buyer to update a client for.
        (required)
      clientAccountId: (int) Unique numerical account ID of the client to
        update. (required)
      request: (Client) A client resource represents a client buyeran agency, a
        brand, or an advertiser customer of the sponsor buyer. Users associated
        with the client buyer have restricted access to the Marketplace and
        certain other sections of the Authorized Buyers UI based on the role
        granted to the client buyer. All fields are required unless otherwise
        specified.

    Returns:
      (Client) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsUpdate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
        },
        request=request,
    )

  def AccountsClientsInvitationsCreate(
      self, accountId, clientAccountId, request):
    r"""Creates and sends out an email invitation to access an Ad Exchange
    client buyer account.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (int) Numerical account ID of the client buyer that the
        user should be associated with. (required)
      request: (ClientUserInvitation) An invitation for a new client user to get
        access to the Authorized Buyers UI. All fields are required unless
        otherwise specified.

    Returns:
      (ClientUserInvitation) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsInvitationsCreate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
        },
        request=request,
    )

  def AccountsClientsInvitationsGet(
      self, accountId, clientAccountId, invitationId):
    r"""Retrieves an existing client user invitation.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (int) Numerical account ID of the client buyer that the
        user invitation to be retrieved is associated with. (required)
      invitationId: (int) Numerical identifier of the user invitation to
        retrieve. (required)

    Returns:
      (ClientUserInvitation) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsInvitationsGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
            'invitationId': invitationId,
        },
    )

  def AccountsClientsInvitationsList(
      self, accountId, clientAccountId, pageSize=None, pageToken=None):
    r"""Lists all the client users invitations for a client with a given account
    ID.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (str) Numerical account ID of the client buyer to list
        invitations for. (required) You must either specify a string
        representation of a numerical account identifier or the `-` character to
        list all the invitations for all the clients of a given sponsor buyer.
      pageSize: (int) Requested page size. Server may return fewer clients than
        requested. If unspecified, server will pick an appropriate default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListClientUserInvitationsResponse.nextPageToken returned from the
        previous call to the clients.invitations.list method.

    Returns:
      (ListClientUserInvitationsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsInvitationsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def AccountsClientsUsersGet(self, accountId, clientAccountId, userId):
    r"""Retrieves an existing client user.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (int) Numerical account ID of the client buyer that the
        user to be retrieved is associated with. (required)
      userId: (int) Numerical identifier of the user to retrieve. (required)

    Returns:
      (ClientUser) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsUsersGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
            'userId': userId,
        },
    )

  def AccountsClientsUsersList(
      self, accountId, clientAccountId, pageSize=None, pageToken=None):
    r"""Lists all the known client users for a specified sponsor buyer account
    ID.

    Args:
      accountId: (int) Numerical account ID of the sponsor buyer of the client
        to list users for. (required)
      clientAccountId: (str) The account ID of the client buyer to list users
        for. (required) You must specify either a string representation of a
        numerical account identifier or the `-` character to list all the client
        users for all the clients of a given sponsor buyer.
      pageSize: (int) Requested page size. The server may return fewer clients
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListClientUsersResponse.nextPageToken returned from the previous call to
        the accounts.clients.users.list method.

    Returns:
      (ListClientUsersResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsUsersList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def AccountsClientsUsersUpdate(
      self, accountId, clientAccountId, userId, request):
    r"""Updates an existing client user. Only the user status can be changed on
    update.

    Args:
      accountId: (int) Numerical account ID of the client's sponsor buyer.
        (required)
      clientAccountId: (int) Numerical account ID of the client buyer that the
        user to be retrieved is associated with. (required)
      userId: (int) Numerical identifier of the user to retrieve. (required)
      request: (ClientUser) A client user is created under a client buyer and
        has restricted access to the Marketplace and certain other sections of
        the Authorized Buyers UI based on the role granted to the associated
        client buyer. The only way a new client user can be created is through
        accepting an email invitation (see the
        accounts.clients.invitations.create method). All fields are required
        unless otherwise specified.

    Returns:
      (ClientUser) The response message.
    """
    config = self.GetMethodConfig('AccountsClientsUsersUpdate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'clientAccountId': clientAccountId,
            'userId': userId,
        },
        request=request,
    )

  def AccountsCreativesCreate(self, accountId, request, duplicateIdMode=None):
    r"""Creates a creative.

    Args:
      accountId: (str) The account that this creative belongs to. Can be used to
        filter the response of the creatives.list method.
      request: (Creative) A creative and its classification data.
      duplicateIdMode: (str) Indicates if multiple creatives can share an ID or
        not. Default is NO_DUPLICATES (one ID per creative).

    Returns:
      (Creative) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesCreate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'duplicateIdMode': duplicateIdMode,
        },
        request=request,
    )

  def AccountsCreativesGet(self, accountId, creativeId):
    r"""Gets a creative.

    Args:
      accountId: (str) The account the creative belongs to.
      creativeId: (str) The ID of the creative to retrieve.

    Returns:
      (Creative) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
    )

  def AccountsCreativesList(
      self, accountId, pageSize=None, pageToken=None, query=None):
    r"""Lists creatives.

    Args:
      accountId: (str) The account to list the creatives from. Specify "-" to
        list all creatives the current user has access to.
      pageSize: (int) Requested page size. The server may return fewer creatives
        than requested (due to timeout constraint) even if more are available
        through another call. If unspecified, server will pick an appropriate
        default. Acceptable values are 1 to 1000, inclusive.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListCreativesResponse.next_page_token returned from the previous call to
        'ListCreatives' method.
      query: (str) An optional query string to filter creatives. If no filter is
        specified, all active creatives will be returned. Supported queries are:
        - accountId=*account_id_string* - creativeId=*creative_id_string* -
        dealsStatus: {approved, conditionally_approved, disapproved,
        not_checked} - openAuctionStatus: {approved, conditionally_approved,
        disapproved, not_checked} - attribute: {a numeric attribute from the
        list of attributes} - disapprovalReason: {a reason from
        DisapprovalReason} Example: 'accountId=12345 AND
        (dealsStatus:disapproved AND disapprovalReason:unacceptable_content) OR
        attribute:47'

    Returns:
      (ListCreativesResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
            'query': query,
        },
    )

  def AccountsCreativesStopWatching(self, accountId, creativeId, request):
    r"""Stops watching a creative. Will stop push notifications being sent to
    the topics when the creative changes status.

    Args:
      accountId: (str) The account of the creative to stop notifications for.
      creativeId: (str) The creative ID of the creative to stop notifications
        for. Specify "-" to specify stopping account level notifications.
      request: (StopWatchingCreativeRequest) A request for stopping
        notifications for changes to creative Status.

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesStopWatching')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        request=request,
    )

  def AccountsCreativesUpdate(self, accountId, creativeId, request):
    r"""Updates a creative.

    Args:
      accountId: (str) The account that this creative belongs to. Can be used to
        filter the response of the creatives.list method.
      creativeId: (str) The buyer-defined creative ID of this creative. Can be
        used to filter the response of the creatives.list method.
      request: (Creative) A creative and its classification data.

    Returns:
      (Creative) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesUpdate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        request=request,
    )

  def AccountsCreativesWatch(self, accountId, creativeId, request):
    r"""Watches a creative. Will result in push notifications being sent to the
    topic when the creative changes status.

    Args:
      accountId: (str) The account of the creative to watch.
      creativeId: (str) The creative ID to watch for status changes. Specify "-"
        to watch all creatives under the above account. If both creative-level
        and account-level notifications are sent, only a single notification
        will be sent to the creative-level notification topic.
      request: (WatchCreativeRequest) A request for watching changes to creative
        Status.

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesWatch')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        request=request,
    )

  def AccountsCreativesDealAssociationsAdd(
      self, accountId, creativeId, request):
    r"""Associate an existing deal with a creative.

    Args:
      accountId: (str) The account the creative belongs to.
      creativeId: (str) The ID of the creative associated with the deal.
      request: (AddDealAssociationRequest) A request for associating a deal and
        a creative.

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesDealAssociationsAdd')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        request=request,
    )

  def AccountsCreativesDealAssociationsList(
      self, accountId, creativeId, pageSize=None, pageToken=None, query=None):
    r"""List all creative-deal associations.

    Args:
      accountId: (str) The account to list the associations from. Specify "-" to
        list all creatives the current user has access to.
      creativeId: (str) The creative ID to list the associations from. Specify
        "-" to list all creatives under the above account.
      pageSize: (int) Requested page size. Server may return fewer associations
        than requested. If unspecified, server will pick an appropriate default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListDealAssociationsResponse.next_page_token returned from the previous
        call to 'ListDealAssociations' method.
      query: (str) An optional query string to filter deal associations. If no
        filter is specified, all associations will be returned. Supported
        queries are: - accountId=*account_id_string* -
        creativeId=*creative_id_string* - dealsId=*deals_id_string* -
        dealsStatus:{approved, conditionally_approved, disapproved, not_checked}
        - openAuctionStatus:{approved, conditionally_approved, disapproved,
        not_checked} Example: 'dealsId=12345 AND dealsStatus:disapproved'

    Returns:
      (ListDealAssociationsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesDealAssociationsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
            'query': query,
        },
    )

  def AccountsCreativesDealAssociationsRemove(
      self, accountId, creativeId, request):
    r"""Remove the association between a deal and a creative.

    Args:
      accountId: (str) The account the creative belongs to.
      creativeId: (str) The ID of the creative associated with the deal.
      request: (RemoveDealAssociationRequest) A request for removing the
        association between a deal and a creative.

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('AccountsCreativesDealAssociationsRemove')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'creativeId': creativeId,
        },
        request=request,
    )

  def AccountsFinalizedProposalsList(
      self, accountId, filter=None, filterSyntax=None, pageSize=None,
      pageToken=None):
    r"""List finalized proposals, regardless if a proposal is being
    renegotiated. A filter expression (PQL query) may be specified to filter the
    results. The notes will not be returned.

    Args:
      accountId: (str) Account ID of the buyer.
      filter: (str) An optional PQL filter query used to query for proposals.
        Nested repeated fields, such as proposal.deals.targetingCriterion,
        cannot be filtered.
      filterSyntax: (str) Syntax the filter is written in. Current
        implementation defaults to PQL but in the future it will be LIST_FILTER.
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) The page token as returned from ListProposalsResponse.

    Returns:
      (ListProposalsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsFinalizedProposalsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'filter': filter,
            'filterSyntax': filterSyntax,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def AccountsFinalizedProposalsPause(self, accountId, proposalId, request):
    r"""Update given deals to pause serving. This method will set the
    `DealServingMetadata.DealPauseStatus.has_buyer_paused` bit to true for all
    listed deals in the request. Currently, this method only applies to PG and
    PD deals. For PA deals, call accounts.proposals.pause endpoint. It is a
    no-op to pause already-paused deals. It is an error to call
    PauseProposalDeals for deals which are not part of the proposal of
    proposal_id or which are not finalized or renegotiating.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The proposal_id of the proposal containing the deals.
      request: (PauseProposalDealsRequest) Request message to pause serving for
        finalized deals.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsFinalizedProposalsPause')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsFinalizedProposalsResume(self, accountId, proposalId, request):
    r"""Update given deals to resume serving. This method will set the
    `DealServingMetadata.DealPauseStatus.has_buyer_paused` bit to false for all
    listed deals in the request. Currently, this method only applies to PG and
    PD deals. For PA deals, call accounts.proposals.resume endpoint. It is a
    no-op to resume running deals or deals paused by the other party. It is an
    error to call ResumeProposalDeals for deals which are not part of the
    proposal of proposal_id or which are not finalized or renegotiating.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The proposal_id of the proposal containing the deals.
      request: (ResumeProposalDealsRequest) Request message to resume (unpause)
        serving for already-finalized deals.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsFinalizedProposalsResume')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProductsGet(self, accountId, productId):
    r"""Gets the requested product by ID.

    Args:
      accountId: (str) Account ID of the buyer.
      productId: (str) The ID for the product to get the head revision for.

    Returns:
      (Product) The response message.
    """
    config = self.GetMethodConfig('AccountsProductsGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'productId': productId,
        },
    )

  def AccountsProductsList(
      self, accountId, filter=None, pageSize=None, pageToken=None):
    r"""List all products visible to the buyer (optionally filtered by the
    specified PQL query).

    Args:
      accountId: (str) Account ID of the buyer.
      filter: (str) An optional PQL query used to query for products. See
        https://developers.google.com/ad-manager/docs/pqlreference for
        documentation about PQL and examples. Nested repeated fields, such as
        product.targetingCriterion.inclusions, cannot be filtered.
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) The page token as returned from ListProductsResponse.

    Returns:
      (ListProductsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsProductsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'filter': filter,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def AccountsProposalsAccept(self, accountId, proposalId, request):
    r"""Mark the proposal as accepted at the given revision number. If the
    number does not match the server's revision number an `ABORTED` error
    message will be returned. This call updates the proposal_state from
    `PROPOSED` to `BUYER_ACCEPTED`, or from `SELLER_ACCEPTED` to `FINALIZED`.
    Upon calling this endpoint, the buyer implicitly agrees to the terms and
    conditions optionally set within the proposal by the publisher.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to accept.
      request: (AcceptProposalRequest) Request to accept a proposal.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsAccept')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsAddNote(self, accountId, proposalId, request):
    r"""Create a new note and attach it to the proposal. The note is assigned a
    unique ID by the server. The proposal revision number will not increase when
    associated with a new note.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to attach the note to.
      request: (AddNoteRequest) Request message for adding a note to a given
        proposal.

    Returns:
      (Note) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsAddNote')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsCancelNegotiation(self, accountId, proposalId, request):
    r"""Cancel an ongoing negotiation on a proposal. This does not cancel or end
    serving for the deals if the proposal has been finalized, but only cancels a
    negotiation unilaterally.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to cancel negotiation for.
      request: (CancelNegotiationRequest) Request to cancel an ongoing
        negotiation.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsCancelNegotiation')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsCompleteSetup(self, accountId, proposalId, request):
    r"""You can opt-in to manually update proposals to indicate that setup is
    complete. By default, proposal setup is automatically completed after their
    deals are finalized. Contact your Technical Account Manager to opt in.
    Buyers can call this method when the proposal has been finalized, and all
    the required creatives have been uploaded using the Creatives API. This call
    updates the `is_setup_completed` field on the deals in the proposal, and
    notifies the seller. The server then advances the revision number of the
    most recent proposal. To mark an individual deal as ready to serve, call
    `buyers.finalizedDeals.setReadyToServe` in the Marketplace API.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to mark as setup completed.
      request: (CompleteSetupRequest) Request message for indicating that the
        proposal's setup step is complete.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsCompleteSetup')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsCreate(self, accountId, request):
    r"""Create the given proposal. Each created proposal and any deals it
    contains are assigned a unique ID by the server.

    Args:
      accountId: (str) Account ID of the buyer.
      request: (Proposal) Represents a proposal in the Marketplace. A proposal
        is the unit of negotiation between a seller and a buyer and contains
        deals which are served. Note: You can't update, create, or otherwise
        modify Private Auction deals through the API. Fields are updatable
        unless noted otherwise.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsCreate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        request=request,
    )

  def AccountsProposalsGet(self, accountId, proposalId):
    r"""Gets a proposal given its ID. The proposal is returned at its head
    revision.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The unique ID of the proposal

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
    )

  def AccountsProposalsList(
      self, accountId, filter=None, filterSyntax=None, pageSize=None,
      pageToken=None):
    r"""List proposals. A filter expression (PQL query) may be specified to
    filter the results. To retrieve all finalized proposals, regardless if a
    proposal is being renegotiated, see the FinalizedProposals resource. Note
    that Bidder/ChildSeat relationships differ from the usual behavior. A Bidder
    account can only see its child seats' proposals by specifying the
    ChildSeat's accountId in the request path.

    Args:
      accountId: (str) Account ID of the buyer.
      filter: (str) An optional PQL filter query used to query for proposals.
        Nested repeated fields, such as proposal.deals.targetingCriterion,
        cannot be filtered.
      filterSyntax: (str) Syntax the filter is written in. Current
        implementation defaults to PQL but in the future it will be LIST_FILTER.
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) The page token as returned from ListProposalsResponse.

    Returns:
      (ListProposalsResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'filter': filter,
            'filterSyntax': filterSyntax,
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def AccountsProposalsPause(self, accountId, proposalId, request):
    r"""Update the given proposal to pause serving. This method will set the
    `DealServingMetadata.DealPauseStatus.has_buyer_paused` bit to true for all
    deals in the proposal. It is a no-op to pause an already-paused proposal. It
    is an error to call PauseProposal for a proposal that is not finalized or
    renegotiating.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to pause.
      request: (PauseProposalRequest) Request message to pause serving for an
        already-finalized proposal.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsPause')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsResume(self, accountId, proposalId, request):
    r"""Update the given proposal to resume serving. This method will set the
    `DealServingMetadata.DealPauseStatus.has_buyer_paused` bit to false for all
    deals in the proposal. Note that if the `has_seller_paused` bit is also set,
    serving will not resume until the seller also resumes. It is a no-op to
    resume an already-running proposal. It is an error to call ResumeProposal
    for a proposal that is not finalized or renegotiating.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The ID of the proposal to resume.
      request: (ResumeProposalRequest) Request message to resume (unpause)
        serving for an already-finalized proposal.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsResume')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsProposalsUpdate(self, accountId, proposalId, request):
    r"""Update the given proposal at the client known revision number. If the
    server revision has advanced since the passed-in
    `proposal.proposal_revision`, an `ABORTED` error message will be returned.
    Only the buyer-modifiable fields of the proposal will be updated. Note that
    the deals in the proposal will be updated to match the passed-in copy. If a
    passed-in deal does not have a `deal_id`, the server will assign a new
    unique ID and create the deal. If passed-in deal has a `deal_id`, it will be
    updated to match the passed-in copy. Any existing deals not present in the
    passed-in proposal will be deleted. It is an error to pass in a deal with a
    `deal_id` not present at head.

    Args:
      accountId: (str) Account ID of the buyer.
      proposalId: (str) The unique ID of the proposal.
      request: (Proposal) Represents a proposal in the Marketplace. A proposal
        is the unit of negotiation between a seller and a buyer and contains
        deals which are served. Note: You can't update, create, or otherwise
        modify Private Auction deals through the API. Fields are updatable
        unless noted otherwise.

    Returns:
      (Proposal) The response message.
    """
    config = self.GetMethodConfig('AccountsProposalsUpdate')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'proposalId': proposalId,
        },
        request=request,
    )

  def AccountsPublisherProfilesGet(self, accountId, publisherProfileId):
    r"""Gets the requested publisher profile by id.

    Args:
      accountId: (str) Account ID of the buyer.
      publisherProfileId: (str) The id for the publisher profile to get.

    Returns:
      (PublisherProfile) The response message.
    """
    config = self.GetMethodConfig('AccountsPublisherProfilesGet')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
            'publisherProfileId': publisherProfileId,
        },
    )

  def AccountsPublisherProfilesList(
      self, accountId, pageSize=None, pageToken=None):
    r"""List all publisher profiles visible to the buyer

    Args:
      accountId: (str) Account ID of the buyer.
      pageSize: (int) Specify the number of results to include per page.
      pageToken: (str) The page token as return from
        ListPublisherProfilesResponse.

    Returns:
      (ListPublisherProfilesResponse) The response message.
    """
    config = self.GetMethodConfig('AccountsPublisherProfilesList')
    return self._RunMethod(
        config,
        path_params={
            'accountId': accountId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsCreate(
      self, ownerName, request, isTransient=None):
    r"""Creates the specified filter set for the account with the given account
    ID.

    Args:
      ownerName: (str) Name of the owner (bidder or account) of the filter set
        to be created. For example: - For a bidder-level filter set for bidder
        123: `bidders/123` - For an account-level filter set for the buyer
        account representing bidder 123: `bidders/123/accounts/123` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456`
      request: (FilterSet) A set of filters that is applied to a request for
        data. Within a filter set, an AND operation is performed across the
        filters represented by each field. An OR operation is performed across
        the filters represented by the multiple values of a repeated field, for
        example, "format=VIDEO AND deal_id=12 AND (seller_network_id=34 OR
        seller_network_id=56)".
      isTransient: (bool) Whether the filter set is transient, or should be
        persisted indefinitely. By default, filter sets are not transient. If
        transient, it will be available for at least 1 hour after creation.

    Returns:
      (FilterSet) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsCreate')
    return self._RunMethod(
        config,
        path_params={
            'ownerName': ownerName,
        },
        query_params={
            'isTransient': isTransient,
        },
        request=request,
    )

  def BiddersAccountsFilterSetsDelete(self, name):
    r"""Deletes the requested filter set from the account with the given account
    ID.

    Args:
      name: (str) Full name of the resource to delete. For example: - For a
        bidder-level filter set for bidder 123: `bidders/123/filterSets/abc` -
        For an account-level filter set for the buyer account representing
        bidder 123: `bidders/123/accounts/123/filterSets/abc` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456/filterSets/abc`

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsDelete')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def BiddersAccountsFilterSetsGet(self, name):
    r"""Retrieves the requested filter set for the account with the given
    account ID.

    Args:
      name: (str) Full name of the resource being requested. For example: - For
        a bidder-level filter set for bidder 123: `bidders/123/filterSets/abc` -
        For an account-level filter set for the buyer account representing
        bidder 123: `bidders/123/accounts/123/filterSets/abc` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456/filterSets/abc`

    Returns:
      (FilterSet) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def BiddersAccountsFilterSetsList(
      self, ownerName, pageSize=None, pageToken=None):
    r"""Lists all filter sets for the account with the given account ID.

    Args:
      ownerName: (str) Name of the owner (bidder or account) of the filter sets
        to be listed. For example: - For a bidder-level filter set for bidder
        123: `bidders/123` - For an account-level filter set for the buyer
        account representing bidder 123: `bidders/123/accounts/123` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilterSetsResponse.nextPageToken returned from the previous call to
        the accounts.filterSets.list method.

    Returns:
      (ListFilterSetsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsList')
    return self._RunMethod(
        config,
        path_params={
            'ownerName': ownerName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsBidMetricsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""Lists all metrics that are measured in terms of number of bids.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidMetricsResponse.nextPageToken returned from the previous call to
        the bidMetrics.list method.

    Returns:
      (ListBidMetricsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsBidMetricsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsBidResponseErrorsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all errors that occurred in bid responses, with the number of bid
    responses affected for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidResponseErrorsResponse.nextPageToken returned from the previous
        call to the bidResponseErrors.list method.

    Returns:
      (ListBidResponseErrorsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsBidResponseErrorsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsBidResponsesWithoutBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bid responses were considered to have no
    applicable bids, with the number of bid responses affected for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidResponsesWithoutBidsResponse.nextPageToken returned from the
        previous call to the bidResponsesWithoutBids.list method.

    Returns:
      (ListBidResponsesWithoutBidsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsBidResponsesWithoutBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsFilteredBidRequestsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons that caused a bid request not to be sent for an
    impression, with the number of bid requests not sent for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilteredBidRequestsResponse.nextPageToken returned from the previous
        call to the filteredBidRequests.list method.

    Returns:
      (ListFilteredBidRequestsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsFilteredBidRequestsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsFilteredBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bids were filtered, with the number of bids
    filtered for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilteredBidsResponse.nextPageToken returned from the previous call
        to the filteredBids.list method.

    Returns:
      (ListFilteredBidsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsFilteredBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsFilteredBidsCreativesList(
      self, filterSetName, creativeStatusId, pageSize=None, pageToken=None):
    r"""List all creatives associated with a specific reason for which bids were
    filtered, with the number of bids filtered for each creative.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      creativeStatusId: (int) The ID of the creative status for which to
        retrieve a breakdown by creative. See
        [creative-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/creative-status-codes).
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListCreativeStatusBreakdownByCreativeResponse.nextPageToken returned
        from the previous call to the filteredBids.creatives.list method.

    Returns:
      (ListCreativeStatusBreakdownByCreativeResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsFilteredBidsCreativesList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
            'creativeStatusId': creativeStatusId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsFilteredBidsDetailsList(
      self, filterSetName, creativeStatusId, pageSize=None, pageToken=None):
    r"""List all details associated with a specific reason for which bids were
    filtered, with the number of bids filtered for each detail.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      creativeStatusId: (int) The ID of the creative status for which to
        retrieve a breakdown by detail. See
        [creative-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/creative-status-codes).
        Details are only available for statuses 10, 14, 15, 17, 18, 19, 86, and
        87.
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListCreativeStatusBreakdownByDetailResponse.nextPageToken returned from
        the previous call to the filteredBids.details.list method.

    Returns:
      (ListCreativeStatusBreakdownByDetailResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsFilteredBidsDetailsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
            'creativeStatusId': creativeStatusId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsImpressionMetricsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""Lists all metrics that are measured in terms of number of impressions.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListImpressionMetricsResponse.nextPageToken returned from the previous
        call to the impressionMetrics.list method.

    Returns:
      (ListImpressionMetricsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsImpressionMetricsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsLosingBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bids lost in the auction, with the number of
    bids that lost for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListLosingBidsResponse.nextPageToken returned from the previous call to
        the losingBids.list method.

    Returns:
      (ListLosingBidsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersAccountsFilterSetsLosingBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersAccountsFilterSetsNonBillableWinningBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which winning bids were not billable, with the
    number of bids not billed for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListNonBillableWinningBidsResponse.nextPageToken returned from the
        previous call to the nonBillableWinningBids.list method.

    Returns:
      (ListNonBillableWinningBidsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersAccountsFilterSetsNonBillableWinningBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsCreate(self, ownerName, request, isTransient=None):
    r"""Creates the specified filter set for the account with the given account
    ID.

    Args:
      ownerName: (str) Name of the owner (bidder or account) of the filter set
        to be created. For example: - For a bidder-level filter set for bidder
        123: `bidders/123` - For an account-level filter set for the buyer
        account representing bidder 123: `bidders/123/accounts/123` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456`
      request: (FilterSet) A set of filters that is applied to a request for
        data. Within a filter set, an AND operation is performed across the
        filters represented by each field. An OR operation is performed across
        the filters represented by the multiple values of a repeated field, for
        example, "format=VIDEO AND deal_id=12 AND (seller_network_id=34 OR
        seller_network_id=56)".
      isTransient: (bool) Whether the filter set is transient, or should be
        persisted indefinitely. By default, filter sets are not transient. If
        transient, it will be available for at least 1 hour after creation.

    Returns:
      (FilterSet) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsCreate')
    return self._RunMethod(
        config,
        path_params={
            'ownerName': ownerName,
        },
        query_params={
            'isTransient': isTransient,
        },
        request=request,
    )

  def BiddersFilterSetsDelete(self, name):
    r"""Deletes the requested filter set from the account with the given account
    ID.

    Args:
      name: (str) Full name of the resource to delete. For example: - For a
        bidder-level filter set for bidder 123: `bidders/123/filterSets/abc` -
        For an account-level filter set for the buyer account representing
        bidder 123: `bidders/123/accounts/123/filterSets/abc` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456/filterSets/abc`

    Returns:
      (Empty) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsDelete')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def BiddersFilterSetsGet(self, name):
    r"""Retrieves the requested filter set for the account with the given
    account ID.

    Args:
      name: (str) Full name of the resource being requested. For example: - For
        a bidder-level filter set for bidder 123: `bidders/123/filterSets/abc` -
        For an account-level filter set for the buyer account representing
        bidder 123: `bidders/123/accounts/123/filterSets/abc` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456/filterSets/abc`

    Returns:
      (FilterSet) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsGet')
    return self._RunMethod(
        config,
        path_params={
            'name': name,
        },
    )

  def BiddersFilterSetsList(self, ownerName, pageSize=None, pageToken=None):
    r"""Lists all filter sets for the account with the given account ID.

    Args:
      ownerName: (str) Name of the owner (bidder or account) of the filter sets
        to be listed. For example: - For a bidder-level filter set for bidder
        123: `bidders/123` - For an account-level filter set for the buyer
        account representing bidder 123: `bidders/123/accounts/123` - For an
        account-level filter set for the child seat buyer account 456 whose
        bidder is 123: `bidders/123/accounts/456`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilterSetsResponse.nextPageToken returned from the previous call to
        the accounts.filterSets.list method.

    Returns:
      (ListFilterSetsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsList')
    return self._RunMethod(
        config,
        path_params={
            'ownerName': ownerName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsBidMetricsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""Lists all metrics that are measured in terms of number of bids.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidMetricsResponse.nextPageToken returned from the previous call to
        the bidMetrics.list method.

    Returns:
      (ListBidMetricsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsBidMetricsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsBidResponseErrorsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all errors that occurred in bid responses, with the number of bid
    responses affected for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidResponseErrorsResponse.nextPageToken returned from the previous
        call to the bidResponseErrors.list method.

    Returns:
      (ListBidResponseErrorsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsBidResponseErrorsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsBidResponsesWithoutBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bid responses were considered to have no
    applicable bids, with the number of bid responses affected for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListBidResponsesWithoutBidsResponse.nextPageToken returned from the
        previous call to the bidResponsesWithoutBids.list method.

    Returns:
      (ListBidResponsesWithoutBidsResponse) The response message.
    """
    config = self.GetMethodConfig(
        'BiddersFilterSetsBidResponsesWithoutBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsFilteredBidRequestsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons that caused a bid request not to be sent for an
    impression, with the number of bid requests not sent for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilteredBidRequestsResponse.nextPageToken returned from the previous
        call to the filteredBidRequests.list method.

    Returns:
      (ListFilteredBidRequestsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsFilteredBidRequestsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsFilteredBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bids were filtered, with the number of bids
    filtered for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListFilteredBidsResponse.nextPageToken returned from the previous call
        to the filteredBids.list method.

    Returns:
      (ListFilteredBidsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsFilteredBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsFilteredBidsCreativesList(
      self, filterSetName, creativeStatusId, pageSize=None, pageToken=None):
    r"""List all creatives associated with a specific reason for which bids were
    filtered, with the number of bids filtered for each creative.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      creativeStatusId: (int) The ID of the creative status for which to
        retrieve a breakdown by creative. See
        [creative-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/creative-status-codes).
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListCreativeStatusBreakdownByCreativeResponse.nextPageToken returned
        from the previous call to the filteredBids.creatives.list method.

    Returns:
      (ListCreativeStatusBreakdownByCreativeResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsFilteredBidsCreativesList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
            'creativeStatusId': creativeStatusId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsFilteredBidsDetailsList(
      self, filterSetName, creativeStatusId, pageSize=None, pageToken=None):
    r"""List all details associated with a specific reason for which bids were
    filtered, with the number of bids filtered for each detail.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      creativeStatusId: (int) The ID of the creative status for which to
        retrieve a breakdown by detail. See
        [creative-status-codes](https://developers.google.com/authorized-buyers/rtb/downloads/creative-status-codes).
        Details are only available for statuses 10, 14, 15, 17, 18, 19, 86, and
        87.
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListCreativeStatusBreakdownByDetailResponse.nextPageToken returned from
        the previous call to the filteredBids.details.list method.

    Returns:
      (ListCreativeStatusBreakdownByDetailResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsFilteredBidsDetailsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
            'creativeStatusId': creativeStatusId,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsImpressionMetricsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""Lists all metrics that are measured in terms of number of impressions.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListImpressionMetricsResponse.nextPageToken returned from the previous
        call to the impressionMetrics.list method.

    Returns:
      (ListImpressionMetricsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsImpressionMetricsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsLosingBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which bids lost in the auction, with the number of
    bids that lost for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListLosingBidsResponse.nextPageToken returned from the previous call to
        the losingBids.list method.

    Returns:
      (ListLosingBidsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsLosingBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )

  def BiddersFilterSetsNonBillableWinningBidsList(
      self, filterSetName, pageSize=None, pageToken=None):
    r"""List all reasons for which winning bids were not billable, with the
    number of bids not billed for each reason.

    Args:
      filterSetName: (str) Name of the filter set that should be applied to the
        requested metrics. For example: - For a bidder-level filter set for
        bidder 123: `bidders/123/filterSets/abc` - For an account-level filter
        set for the buyer account representing bidder 123:
        `bidders/123/accounts/123/filterSets/abc` - For an account-level filter
        set for the child seat buyer account 456 whose bidder is 123:
        `bidders/123/accounts/456/filterSets/abc`
      pageSize: (int) Requested page size. The server may return fewer results
        than requested. If unspecified, the server will pick an appropriate
        default.
      pageToken: (str) A token identifying a page of results the server should
        return. Typically, this is the value of
        ListNonBillableWinningBidsResponse.nextPageToken returned from the
        previous call to the nonBillableWinningBids.list method.

    Returns:
      (ListNonBillableWinningBidsResponse) The response message.
    """
    config = self.GetMethodConfig('BiddersFilterSetsNonBillableWinningBidsList')
    return self._RunMethod(
        config,
        path_params={
            'filterSetName': filterSetName,
        },
        query_params={
            'pageSize': pageSize,
            'pageToken': pageToken,
        },
    )


Adexchangebuyer2 = Adexchangebuyer2V2beta1
