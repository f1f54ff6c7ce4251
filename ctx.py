# Copyright (c) 2019-2020 SAP SE or an SAP affiliate company. All rights reserved. This file is
# licensed under the Apache Software License, v. 2 except as noted otherwise in the LICENSE file
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import dataclasses
import os
import typing

import dacite

import ci.util
import devdocs.model as dm

'''
Execution context. Filled upon invocation of cli_gen.py, read by submodules
'''

args = None # the parsed command line arguments
cfg = None # initialised upon importing this module

DEFAULT_CFG_FILE_NAME = '.dev-docs.cfg'


@dataclasses.dataclass
class TerminalCfg:
    output_columns: typing.Optional[int] = None
    terminal_type: typing.Optional[str] = None


@dataclasses.dataclass
class GithubCfg:
    http_url: str = dm.GITHUB_URL
    api_url: typing.Optional[str] = None # derived from http_url, if not set
    token: typing.Optional[str] = None
    verify_ssl: bool = True


@dataclasses.dataclass
class DevDocsCfg:
    repo: typing.Optional[str] = None # <owner>/<name>
    label: str = dm.DEV_DOCS_LABEL
    dialect: dm.Dialect = dm.Dialect.MARKDOWN
    layout: dm.Layout = dm.Layout.HEADING
    only_closed: bool = True


@dataclasses.dataclass
class GlobalConfig:
    github: typing.Optional[GithubCfg] = None
    dev_docs: typing.Optional[DevDocsCfg] = None
    terminal: typing.Optional[TerminalCfg] = None


def _from_dict(data_class, data: dict):
    return dacite.from_dict(
        data_class=data_class,
        data=data,
        config=dacite.Config(
            cast=[dm.Dialect, dm.Layout],
        ),
    )


def _drop_empty(raw: dict) -> dict:
    '''
    removes None-values (recursively), so they do not overwrite values from other config-sources
    '''
    return {
        k: _drop_empty(v) if isinstance(v, dict) else v
        for k, v in raw.items()
        if v is not None and v != {}
    }


def _config_from_env(env=None) -> dict:
    if env is None:
        env = os.environ

    columns = env.get('COLUMNS')

    return _drop_empty({
        'terminal': {
            'output_columns': int(columns) if columns and columns.isdigit() else None,
            'terminal_type': env.get('TERM'),
        },
        'github': {
            'http_url': env.get('GITHUB_SERVER_URL'),
            'api_url': env.get('GITHUB_API_URL'),
            'token': env.get('GITHUB_TOKEN'),
        },
        'dev_docs': {
            'repo': env.get('DEV_DOCS_REPO'),
            'label': env.get('DEV_DOCS_LABEL'),
        },
    })


def _config_from_file(cfg_file_path: str) -> dict | None:
    if not os.path.isfile(cfg_file_path):
        return None

    raw = ci.util.parse_yaml_file(cfg_file_path) or {}
    if not isinstance(raw, dict):
        ci.util.fail(f'expected a mapping in {cfg_file_path=}')

    return raw


def _config_from_user_home() -> dict | None:
    return _config_from_file(
        os.path.join(os.path.expanduser('~'), DEFAULT_CFG_FILE_NAME),
    )


def _config_from_parsed_argv() -> dict | None:
    if not args or not getattr(args, 'cfg_file', None):
        return None

    ci.util.existing_file(args.cfg_file)
    return _config_from_file(args.cfg_file)


def load_config(env=None) -> GlobalConfig:
    '''
    (re-)loads the global configuration. Sources are honoured in the following order (later
    sources take precedence):

    - defaults
    - `~/.dev-docs.cfg` (YAML)
    - environment (GITHUB_TOKEN, GITHUB_API_URL, GITHUB_SERVER_URL, DEV_DOCS_REPO, DEV_DOCS_LABEL)
    - config file passed via `--cfg-file`
    '''
    global cfg

    defaults = dataclasses.asdict(GlobalConfig(
        github=GithubCfg(),
        dev_docs=DevDocsCfg(),
        terminal=TerminalCfg(),
    ))

    additional_cfgs = [
        raw for raw in (
            _config_from_user_home(),
            _config_from_env(env=env),
            _config_from_parsed_argv(),
        ) if raw
    ]

    merged = ci.util.merge_dicts(defaults, *additional_cfgs) if additional_cfgs else defaults

    cfg = _from_dict(GlobalConfig, merged)
    return cfg


load_config()
