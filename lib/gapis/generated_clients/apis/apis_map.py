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
"""The registry entry of one generated API version.

This source is copied verbatim into the generated apis_map.py, above the MAP of
every registered API version.
"""


class APIDef(object):
  """Where the client and messages of an API version live.

  Attributes:
    class_path: str, The package of the version, such as
      gapis.generated_clients.apis.assuredworkloads.v1.
    client_classpath: str, The client class relative to class_path.
    messages_modulepath: str, The messages module relative to class_path.
    default_version: bool, Whether clients use this version unless told
      otherwise.
    base_url: str, The endpoint of the version from its Discovery document.
  """

  def __init__(self, class_path, client_classpath, messages_modulepath,
               default_version=False, base_url=''):
    self.class_path = class_path
    self.client_classpath = client_classpath
    self.messages_modulepath = messages_modulepath
    self.default_version = default_version
    self.base_url = base_url

  @property
  def client_full_classpath(self):
    return '.'.join([self.class_path, self.client_classpath])

  @property
  def messages_full_modulepath(self):
    return '.'.join([self.class_path, self.messages_modulepath])

  def __eq__(self, other):
    return type(other) is type(self) and vars(other) == vars(self)

  def __ne__(self, other):
    return not self == other

  def get_init_source(self):
    """Returns the constructor call recreating this APIDef."""
    quoted = ['"{0}"'.format(value) for value in (
        self.class_path, self.client_classpath, self.messages_modulepath)]
    return 'APIDef({0}, {1}, "{2}")'.format(
        ', '.join(quoted), self.default_version, self.base_url)

  def __repr__(self):
    return self.get_init_source()


MAP = {
    'adexchangebuyer2': {
        'v2beta1':
            APIDef("gapis.generated_clients.apis.adexchangebuyer2.v2beta1", "adexchangebuyer2_v2beta1_client.Adexchangebuyer2V2beta1", "adexchangebuyer2_v2beta1_messages", True, "https://adexchangebuyer.googleapis.com/"),
    },
    'assuredworkloads': {
        'v1':
            APIDef("gapis.generated_clients.apis.assuredworkloads.v1", "assuredworkloads_v1_client.AssuredworkloadsV1", "assuredworkloads_v1_messages", True, "https://assuredworkloads.googleapis.com/"),
    },
    'cloudsupport': {
        'v2beta':
            APIDef("gapis.generated_clients.apis.cloudsupport.v2beta", "cloudsupport_v2beta_client.CloudsupportV2beta", "cloudsupport_v2beta_messages", True, "https://cloudsupport.googleapis.com/"),
    },
    'lifesciences': {
        'v2beta':
            APIDef("gapis.generated_clients.apis.lifesciences.v2beta", "lifesciences_v2beta_client.LifesciencesV2beta", "lifesciences_v2beta_messages", True, "https://lifesciences.googleapis.com/"),
    },
    'toolresults': {
        'v1beta3':
            APIDef("gapis.generated_clients.apis.toolresults.v1beta3", "toolresults_v1beta3_client.ToolresultsV1beta3", "toolresults_v1beta3_messages", True, "https://toolresults.googleapis.com/"),
    },
}
