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
"""Splits API request URLs into the API, version and resource path."""

from urllib import parse

from gapis.core import exceptions


class InvalidEndpointException(exceptions.Error):
  """A URL is not an http or https URL."""

  def __init__(self, url):
    super(InvalidEndpointException, self).__init__(
        'URL does not start with http:// or https:// [{0}]'.format(url))


def SplitDefaultEndpointUrl(url):
  """Returns the (api_name, api_version, resource_path) of a request URL.

  Service domains carry the API name in the host, as in
  https://assuredworkloads.googleapis.com/v1/organizations/1. The
  www.googleapis.com domain and every other host carry it in the first path
  segment, as in https://www.googleapis.com/storage/v1/b/bucket.

  Args:
    url: str, An absolute request URL. The query string is ignored.

  Raises:
    InvalidEndpointException: The URL is not http or https.

  Returns:
    (str, str, str), The API name and version, None where the URL has none,
    and the remaining path without surrounding slashes.
  """
  split = parse.urlsplit(url)
  if split.scheme not in ('http', 'https'):
    raise InvalidEndpointException(url)
  host = split.netloc
  segments = split.path.strip('/').split('/') if split.path.strip('/') else []
  if 'googleapis' in host and not host.startswith(('www.', 'www-')):
    segments.insert(0, host.split('.')[0])
  segments += [None] * (2 - min(len(segments), 2))
  return segments[0], segments[1], '/'.join(segments[2:])
