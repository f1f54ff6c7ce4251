# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import functools
import logging
import urllib.parse

import github3
import github3.github

import ci.util
import ctx

logger = logging.getLogger(__name__)


def github_api_ctor(
    github_cfg: ctx.GithubCfg,
):
    '''returns the appropriate github3.GitHub constructor for the given github config

    In case the configured URL does not refer to github.com, the c'tor for GithubEnterprise is
    returned with the url argument preset, thus disburdening users to differentiate
    between github.com and non-github.com cases.
    '''
    github_url = github_cfg.http_url

    parsed = urllib.parse.urlparse(github_url)
    if parsed.scheme:
        hostname = parsed.hostname
    else:
        raise ValueError('failed to parse url: ' + str(github_url))

    if hostname.lower() == 'github.com':
        return github3.github.GitHub
    else:
        return functools.partial(
            github3.github.GitHubEnterprise,
            url=github_url,
            verify=github_cfg.verify_ssl,
        )


def github_api(
    github_cfg: ctx.GithubCfg=None,
) -> github3.GitHub:
    '''
    returns a github3 client for the given config (defaults to the global configuration). If a
    token is configured, the client will be authenticated. Otherwise, anonymous access (with
    its considerably lower rate-limits) is used.
    '''
    if not github_cfg:
        github_cfg = ci.util.ctx().cfg.github

    github_ctor = github_api_ctor(github_cfg=github_cfg)

    if github_cfg.token:
        github_api = github_ctor(token=github_cfg.token)
    else:
        logger.warning('no github token configured - falling back to anonymous access')
        github_api = github_ctor()

    if not github_api:
        ci.util.fail(f'Could not connect to GitHub-instance {github_cfg.http_url}')

    if github_cfg.api_url:
        github_api._github_url = github_cfg.api_url.rstrip('/')

    return github_api
