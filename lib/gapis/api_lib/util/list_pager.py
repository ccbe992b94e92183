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
"""Iterates over every item of a paged List method."""


def YieldFromList(method, *args, field, limit=None, batch_size=None,
                  next_token_attribute='nextPageToken',
                  batch_size_attribute='pageSize',
                  page_token_attribute='pageToken', predicate=None, **kwargs):
  """Calls a List method page after page and yields the listed items.

  Args:
    method: A bound List method of a generated client, such as
      client.OrganizationsLocationsWorkloadsList.
    *args: Positional arguments of method, usually the parent.
    field: str, The response field holding the items.
    limit: int, Stop after this many items, None for all of them.
    batch_size: int, The page size to ask for, None for the server default.
    next_token_attribute: str, The response field holding the next page
      token.
    batch_size_attribute: str, The keyword argument of method taking the page
      size, None when method has none.
    page_token_attribute: str, The keyword argument of method taking the page
      token.
    predicate: f(item) -> bool, Only items it accepts are yielded and
      counted.
    **kwargs: Other keyword arguments of method, such as filter.

  Yields:
    The items of every page, in order.
  """
  remaining = limit
  while remaining is None or remaining > 0:
    call_kwargs = dict(kwargs)
    if batch_size_attribute and batch_size is not None:
      call_kwargs[batch_size_attribute] = (
          batch_size if remaining is None else min(batch_size, remaining))
    response = method(*args, **call_kwargs)

    for item in getattr(response, field):
      if predicate and not predicate(item):
        continue
      yield item
      if remaining is not None:
        remaining -= 1
        if not remaining:
          return

    page_token = getattr(response, next_token_attribute)
    if not page_token:
      return
    kwargs[page_token_attribute] = page_token
