# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging
import re
import typing

import semver

logger = logging.getLogger(__name__)

'''
strict release-label notation, as used for labels on issues and pull requests (e.g. `v7.10.0`)
'''
RELEASE_LABEL_PATTERN = re.compile(r'^v(\d+)\.(\d+)\.(\d+)$')
MINOR_RELEASE_LABEL_PATTERN = re.compile(r'^v\d+\.\d+\.0$')


def is_release_label(label: str) -> bool:
    if not isinstance(label, str):
        return False
    return bool(RELEASE_LABEL_PATTERN.fullmatch(label))


def is_minor_release_label(label: str) -> bool:
    if not isinstance(label, str):
        return False
    return bool(MINOR_RELEASE_LABEL_PATTERN.fullmatch(label))


def parse_to_semver(
    version,
    invalid_semver_ok: bool=False,
) -> semver.VersionInfo | None:
    '''
    parses the given version into a semver.VersionInfo object.

    Different from strict semver, a leading `v` is stripped away (release labels are
    always prefixed with `v`). Release labels are compared numerically, so leading zeros
    (e.g. `v07.2.0`) are accepted for those.

    @param version: either a str, or a semver.VersionInfo
    @param invalid_semver_ok: if set, None is returned for unparsable versions instead of
                              raising a ValueError
    '''
    if isinstance(version, semver.VersionInfo):
        return version
    if version is None:
        if invalid_semver_ok:
            return None
        raise ValueError('version must not be None')

    version_str = str(version).strip()

    try:
        return _parse_to_semver(version_str)
    except ValueError:
        if invalid_semver_ok:
            return None
        raise


def _parse_to_semver(version: str) -> semver.VersionInfo:
    if not version:
        raise ValueError(f'not a valid (semver) version: `{version}`')

    if (label_match := RELEASE_LABEL_PATTERN.fullmatch(version)):
        major, minor, patch = (int(part) for part in label_match.groups())
        return semver.VersionInfo(major, minor, patch)

    semver_version = version.removeprefix('v')

    try:
        return semver.VersionInfo.parse(semver_version)
    except ValueError:
        # re-raise with original version str
        raise ValueError(f'not a valid (semver) version: `{version}`')


def sort_versions(
    versions: typing.Iterable[str],
    descending: bool=False,
) -> list[str]:
    '''
    sorts the given versions according to semver arithmetics (so that `v7.10.0` is greater than
    `v7.9.0`). Versions that cannot be parsed are dropped (and logged).
    '''
    parsed = []
    for v in versions:
        if not (semver_version := parse_to_semver(v, invalid_semver_ok=True)):
            logger.debug(f'ignoring unparsable version {v=}')
            continue
        parsed.append((semver_version, v))

    return [
        v for _, v in sorted(parsed, key=lambda t: t[0], reverse=descending)
    ]
