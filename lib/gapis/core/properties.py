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
"""Read and write properties for gapis.

Property values are looked up, in order, in the GAPIS_<SECTION>_<NAME>
environment variable, in the properties file and finally in the property
callbacks and default. The properties file is an INI file at the path named by
the GAPIS_CONFIG environment variable, or ~/.config/gapis/properties.

  api_key = properties.VALUES.core.api_key.Get()
  properties.VALUES.core.log_http.Set(True)
"""

import configparser
import os
from urllib import parse

from gapis.core import exceptions


CONFIG_ENV_VAR = 'GAPIS_CONFIG'
_ENV_PREFIX = 'GAPIS'
_DEFAULT_PROPERTIES_FILE = os.path.join('~', '.config', 'gapis', 'properties')

_TRUE_STRINGS = ('true', '1', 'on', 'yes', 'y')
_FALSE_STRINGS = ('false', '0', 'off', 'no', 'n', '', 'none')


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class PropertiesParseError(Error):
  """The properties file is not a valid INI file."""


class NoSuchPropertyError(Error):
  """A section or property name is unknown."""


class InvalidValueError(Error):
  """A property value does not pass validation."""


class RequiredPropertyError(Error):
  """A required property has no value."""

  def __init__(self, prop):
    super(RequiredPropertyError, self).__init__(
        'Property [{0}] is required but not set. Set it with the [{1}] '
        'environment variable or in the [{2}] section of the properties '
        'file.'.format(prop, prop.EnvironmentName(), prop.section))
    self.property = prop


def _ToString(value):
  return value if isinstance(value, str) else str(value)


def _ValidateBool(prop, value):
  if _ToString(value).lower() not in _TRUE_STRINGS + _FALSE_STRINGS:
    raise InvalidValueError(
        'Property [{0}] must be a boolean, not [{1}].'.format(prop, value))


def _ValidateChoice(prop, value):
  if value is not None and value not in prop.choices:
    raise InvalidValueError(
        'Property [{0}] must be one of [{1}], not [{2}].'.format(
            prop, ', '.join(prop.choices), value))


def _ValidateEndpoint(prop, value):
  """Endpoint overrides are absolute http(s) URLs ending in a slash."""
  if value is None:
    return
  url = parse.urlsplit(value)
  if (url.scheme not in ('http', 'https') or not url.netloc or
      not url.path.endswith('/')):
    raise InvalidValueError(
        'Property [{0}] must be an http:// or https:// URL ending with a '
        '\'/\', not [{1}].'.format(prop, value))


class PropertiesFile(object):
  """A read-only view of the INI properties file."""

  def __init__(self, path):
    self.path = path
    self._config = configparser.ConfigParser()
    if path and os.path.isfile(path):
      try:
        self._config.read(path)
      except configparser.Error as e:
        raise PropertiesParseError(
            'Unable to parse properties file [{0}]: {1}'.format(path, e))

  @classmethod
  def Load(cls):
    path = os.environ.get(CONFIG_ENV_VAR) or os.path.expanduser(
        _DEFAULT_PROPERTIES_FILE)
    return cls(path)

  def Get(self, section, name):
    return self._config.get(section, name, fallback=None)

  def Options(self, section):
    if not self._config.has_section(section):
      return []
    return self._config.options(section)


class Property(object):
  """A single property.

  Attributes:
    section: str, The section the property belongs to.
    name: str, The property name within its section.
    help_text: str, What the property controls.
    default: str, The value used when nothing else sets the property.
    choices: (str,), The allowed values, or None for any.
  """

  def __init__(self, section, name, help_text=None, default=None,
               choices=None, validator=None):
    self.section = section
    self.name = name
    self.help_text = help_text
    self.default = default
    self.choices = choices
    self._validator = validator
    self._callbacks = []

  def __str__(self):
    return '{0}/{1}'.format(self.section, self.name)

  def EnvironmentName(self):
    return '_'.join([_ENV_PREFIX, self.section.upper(), self.name.upper()])

  def AddCallback(self, callback):
    """Adds a function consulted when no environment or file value exists."""
    self._callbacks.append(callback)

  def RemoveCallback(self, callback):
    self._callbacks.remove(callback)

  def Validate(self, value):
    if self._validator:
      self._validator(self, value)

  def _Lookup(self, properties_file):
    value = os.environ.get(self.EnvironmentName())
    if value is None:
      value = properties_file.Get(self.section, self.name)
    for callback in self._callbacks:
      if value is not None:
        break
      value = callback()
    if value is None:
      value = self.default
    return None if value is None else _ToString(value)

  def Get(self, required=False, validate=True, properties_file=None):
    """Returns the property value as a string.

    Args:
      required: bool, Raise RequiredPropertyError when the property is unset.
      validate: bool, Run the value through the property's validator.
      properties_file: PropertiesFile, An already loaded file to read from.

    Raises:
      RequiredPropertyError: The property is required and unset.
      InvalidValueError: The value does not validate.

    Returns:
      str, The value, or None if the property is unset.
    """
    value = self._Lookup(properties_file or PropertiesFile.Load())
    if value is None and required:
      raise RequiredPropertyError(self)
    if validate:
      self.Validate(value)
    return value

  def GetOrFail(self):
    return self.Get(required=True)

  def GetBool(self, required=False):
    """Returns True or False, or None when the property is unset."""
    value = self.Get(required=required, validate=False)
    if value is None or value.lower() == 'none':
      return None
    return value.lower() in _TRUE_STRINGS

  def GetInt(self, required=False):
    """Returns the value as an int, or None when the property is unset."""
    value = self.Get(required=required, validate=False)
    if value is None:
      return None
    try:
      return int(value)
    except ValueError:
      raise InvalidValueError(
          'Property [{0}] must be an integer, not [{1}].'.format(self, value))

  def Set(self, value):
    """Sets the property for this process, or clears it when value is None."""
    self.Validate(value)
    if value is None:
      os.environ.pop(self.EnvironmentName(), None)
    else:
      os.environ[self.EnvironmentName()] = _ToString(value)


class Section(object):
  """A named group of properties."""

  def __init__(self, name):
    self.name = name
    self._properties = {}

  def __iter__(self):
    return iter(self._properties.values())

  def _Define(self, name, help_text=None, default=None, choices=None,
              validator=None):
    if choices and not validator:
      validator = _ValidateChoice
    prop = Property(self.name, name, help_text=help_text, default=default,
                    choices=choices, validator=validator)
    self._properties[name] = prop
    return prop

  def _DefineBool(self, name, help_text=None, default=None):
    return self._Define(name, help_text=help_text, default=default,
                        validator=_ValidateBool)

  def HasProperty(self, name):
    return name in self._properties

  def Property(self, name):
    if name not in self._properties:
      raise NoSuchPropertyError(
          'Section [{0}] has no property [{1}].'.format(self.name, name))
    return self._properties[name]

  def AllValues(self, list_unset=False):
    """Returns {name: value} for the properties of this section.

    Args:
      list_unset: bool, Include unset properties with a None value.
    """
    properties_file = PropertiesFile.Load()
    values = {}
    for prop in self:
      value = prop.Get(validate=False, properties_file=properties_file)
      if value is not None or list_unset:
        values[prop.name] = value
    return values


class _PerApiSection(Section):
  """A section with one property per API name, created on first use."""

  def __init__(self, name, validator=None):
    super(_PerApiSection, self).__init__(name)
    self._validator = validator

  def Property(self, name):
    if not self.HasProperty(name):
      self._Define(name, validator=self._validator)
    return super(_PerApiSection, self).Property(name)

  def AllValues(self, list_unset=False):
    env_prefix = '_'.join([_ENV_PREFIX, self.name.upper(), ''])
    names = set(PropertiesFile.Load().Options(self.name))
    names.update(env_name[len(env_prefix):].lower()
                 for env_name in os.environ
                 if env_name.startswith(env_prefix) and
                 len(env_name) > len(env_prefix))
    for name in names:
      self.Property(name)
    return super(_PerApiSection, self).AllValues(list_unset=list_unset)


class _CoreSection(Section):

  def __init__(self):
    super(_CoreSection, self).__init__('core')
    self.api_key = self._Define(
        'api_key',
        help_text='An API key sent as the [key] query parameter of every '
        'request.')
    self.custom_ca_certs_file = self._Define(
        'custom_ca_certs_file',
        help_text='A CA bundle used to verify TLS connections.')
    self.disable_color = self._DefineBool(
        'disable_color',
        help_text='Never color console log output.')
    self.http_timeout = self._Define(
        'http_timeout',
        help_text='Seconds to wait on the socket of an API request.')
    self.log_http = self._DefineBool(
        'log_http', default=False,
        help_text='Log every HTTP request and response at the INFO level.')
    self.log_http_redact_token = self._DefineBool(
        'log_http_redact_token', default=True,
        help_text='Hide the Authorization header in logged HTTP traffic.')
    self.max_log_days = self._Define(
        'max_log_days', default='30',
        help_text='Days to keep log files. 0 keeps them forever.')
    self.user_agent = self._Define(
        'user_agent',
        help_text='A product token appended to the User-Agent header.')
    self.user_output_enabled = self._DefineBool(
        'user_output_enabled',
        help_text='When False, nothing is printed to stdout or stderr except '
        'log records.')
    self.verbosity = self._Define(
        'verbosity',
        choices=('debug', 'info', 'warning', 'error', 'critical', 'none'),
        help_text='The console log level. Defaults to warning.')


class _AuthSection(Section):

  def __init__(self):
    super(_AuthSection, self).__init__('auth')
    self.access_token_file = self._Define(
        'access_token_file',
        help_text='A file holding an OAuth2 access token that is used as is.')
    self.credential_file_override = self._Define(
        'credential_file_override',
        help_text='A service account key or authorized user file used '
        'instead of Application Default Credentials.')
    self.disable_credentials = self._DefineBool(
        'disable_credentials', default=False,
        help_text='Send requests without credentials.')
    self.disable_ssl_validation = self._DefineBool(
        'disable_ssl_validation',
        help_text='Skip TLS certificate validation.')
    self.scopes = self._Define(
        'scopes',
        help_text='Comma separated OAuth2 scopes that replace the scopes of '
        'the API client.')


class _BillingSection(Section):

  def __init__(self):
    super(_BillingSection, self).__init__('billing')
    self.quota_project = self._Define(
        'quota_project',
        help_text='The project charged for quota, sent as the '
        '[X-Goog-User-Project] header.')


class _Values(object):
  """All known property sections.

  Attributes:
    api_client_overrides: Section, The client version to use per API.
    api_endpoint_overrides: Section, The base URL to use per API.
    auth: Section, Credential properties.
    billing: Section, Quota project properties.
    core: Section, General properties.
  """

  def __init__(self):
    self.api_client_overrides = _PerApiSection('api_client_overrides')
    self.api_endpoint_overrides = _PerApiSection(
        'api_endpoint_overrides', validator=_ValidateEndpoint)
    self.auth = _AuthSection()
    self.billing = _BillingSection()
    self.core = _CoreSection()
    self._sections = {
        section.name: section for section in (
            self.api_client_overrides, self.api_endpoint_overrides,
            self.auth, self.billing, self.core)}

  @property
  def default_section(self):
    return self.core

  def __iter__(self):
    return iter(self._sections.values())

  def Section(self, name):
    if name not in self._sections:
      raise NoSuchPropertyError('Section [{0}] does not exist.'.format(name))
    return self._sections[name]

  def AllSections(self):
    return sorted(self._sections)

  def AllValues(self, list_unset=False):
    """Returns {section: {name: value}}, leaving out empty sections."""
    values = {}
    for section in self:
      section_values = section.AllValues(list_unset=list_unset)
      if section_values:
        values[section.name] = section_values
    return values


VALUES = _Values()


def FromString(property_string):
  """Looks up a property from a section/name or a core property name.

  Args:
    property_string: str, For example auth/scopes or api_key.

  Raises:
    NoSuchPropertyError: The section or the property does not exist.

  Returns:
    Property, The property, or None for an empty string.
  """
  if not property_string:
    return None
  section, _, name = property_string.rpartition('/')
  if not name:
    return None
  return VALUES.Section(section or VALUES.default_section.name).Property(name)
