# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import semver
import pytest

import version


@pytest.mark.parametrize(
    'label,expected',
    [
        ('v7.10.0', True),
        ('v0.0.1', True),
        ('7.10.0', False),
        ('v7.10', False),
        ('v7.10.0-rc1', False),
        ('v7.10.0 ', False),
        ('release_note:dev_docs', False),
        (None, False),
    ],
)
def test_is_release_label(label, expected):
    assert version.is_release_label(label) is expected


def test_is_minor_release_label():
    assert version.is_minor_release_label('v7.10.0')
    assert not version.is_minor_release_label('v7.10.1')
    assert not version.is_minor_release_label('7.10.0')


def test_parse_to_semver():
    assert version.parse_to_semver('v7.10.0') == semver.VersionInfo(7, 10, 0)
    assert version.parse_to_semver('1.2.3') == semver.VersionInfo(1, 2, 3)

    parsed = semver.VersionInfo.parse('1.2.3')
    assert version.parse_to_semver(parsed) is parsed

    with pytest.raises(ValueError):
        version.parse_to_semver('invalid')
    with pytest.raises(ValueError):
        version.parse_to_semver(None)
    with pytest.raises(ValueError):
        version.parse_to_semver('')

    assert version.parse_to_semver('invalid', invalid_semver_ok=True) is None


def test_parse_to_semver_release_label_w_leading_zeros():
    assert version.parse_to_semver('v07.2.0') == semver.VersionInfo(7, 2, 0)
    assert version.parse_to_semver('v7.02.010') == semver.VersionInfo(7, 2, 10)

    # leading zeros are only tolerated for release labels
    with pytest.raises(ValueError):
        version.parse_to_semver('07.2.0')


def test_sort_versions():
    versions = ('v7.10.0', 'v7.9.0', 'v10.0.0', 'garbage', 'v7.9.1')

    assert version.sort_versions(versions) == ['v7.9.0', 'v7.9.1', 'v7.10.0', 'v10.0.0']
    assert version.sort_versions(versions, descending=True) == \
        ['v10.0.0', 'v7.10.0', 'v7.9.1', 'v7.9.0']
