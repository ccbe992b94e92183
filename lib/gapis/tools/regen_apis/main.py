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
"""Command line entry point of the client generator.

  gapis-regen config --config regen_config.yaml [--api NAME/VERSION]
  gapis-regen directory --output-dir OUT [--root-package PKG] [--index FILE]
"""

import argparse
import logging
import os
import sys

from gapis.tools.regen_apis import regen
import yaml

_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _SelectedApis(apis_config, api=None):
  """Yields (api_name, api_version, api_config) of the apis to regenerate.

  Args:
    apis_config: {api_name: {api_version: api_config}}, The configured apis.
    api: str, NAME/VERSION of a single api, None for all of them.
  """
  if api:
    api_name, api_version = api.split('/')
    yield api_name, api_version, apis_config[api_name][api_version]
    return
  for api_name, versions in apis_config.items():
    for api_version, api_config in versions.items():
      yield api_name, api_version, api_config


def _RegenFromConfig(args):
  with open(args.config) as config_file:
    config = yaml.safe_load(config_file)
  logging.debug('Loaded %s, generating under %s', args.config, args.base_dir)
  root_dir = config['root_dir']
  for api_name, api_version, api_config in _SelectedApis(config['apis'],
                                                         args.api):
    logging.info('Generating %s %s', api_name, api_version)
    regen.GenerateApi(args.base_dir, root_dir, api_name, api_version,
                      api_config)
  regen.GenerateApiMap(args.base_dir, root_dir, config['apis'])
  return 0


def _RegenFromDirectory(args):
  root_package = args.root_package or os.path.basename(
      os.path.normpath(args.output_dir))
  generated, failures = regen.GenerateFromDirectory(
      args.output_dir, root_package, index_file=args.index)
  logging.info('Generated %d apis, %d failed', len(generated), len(failures))
  # Partial failures are expected when generating the whole directory.
  return 1 if failures and not generated else 0


def _MakeParser():
  parser = argparse.ArgumentParser(
      description='Generates Python clients from Discovery documents.')
  parser.add_argument('-l', '--log-level', choices=_LOG_LEVELS,
                      default='INFO', help='Logging level.')
  commands = parser.add_subparsers(dest='command')
  commands.required = True

  config = commands.add_parser(
      'config', help='Generate the apis of a regeneration config file.')
  config.add_argument('--config', required=True,
                      help='The YAML regeneration config.')
  config.add_argument('--base-dir', default=os.getcwd(),
                      help='The directory the root_dir of the config is in.')
  config.add_argument('--api',
                      help='NAME/VERSION of the only api to generate.')
  config.set_defaults(func=_RegenFromConfig)

  directory = commands.add_parser(
      'directory',
      help='Generate every preferred api of the Discovery directory.')
  directory.add_argument('--output-dir', required=True,
                         help='The directory to generate clients in.')
  directory.add_argument('--root-package',
                         help='The package of --output-dir, its base name by '
                         'default.')
  directory.add_argument('--index',
                         help='Also write an HTML index of the generated '
                         'apis to this file.')
  directory.set_defaults(func=_RegenFromDirectory)
  return parser


def main(argv=None):
  argv = sys.argv if argv is None else argv
  args = _MakeParser().parse_args(argv[1:])
  logging.basicConfig(
      format='%(asctime)s %(levelname)s %(name)s: %(message)s',
      level=args.log_level)
  return args.func(args)


if __name__ == '__main__':
  sys.exit(main())
