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
"""Errors and name aliases of the generated client registry."""

from gapis.core import exceptions


# Other names an API can be looked up by, mapped to its registered name.
_API_NAME_ALIASES = {
    'assured_workloads': 'assuredworkloads',
}


class UnknownAPIError(exceptions.Error):
  """No API of that name is registered."""

  def __init__(self, api_name):
    super(UnknownAPIError, self).__init__(
        'API [{0}] is not registered in the APIs map.'.format(api_name))


class UnknownVersionError(exceptions.Error):
  """The API is registered but not at that version."""

  def __init__(self, api_name, api_version):
    super(UnknownVersionError, self).__init__(
        'API [{0}] has no version [{1}] in the APIs map.'.format(
            api_name, api_version))
