import pytest

import devdocs.releases as dr


def test_release_labels():
    labels = {
        'v7.2.0', 'release_note:dev_docs', 'v7.4.0', 'Team:Core', 'v7.4', '7.4.0', 'v7.4.0-rc1',
    }

    assert sorted(dr.release_labels(labels)) == ['v7.2.0', 'v7.4.0']


def test_excluded_if_any_label_is_smaller():
    assert dr.is_already_released(
        target_version='v7.3.0',
        ticket_labels={'v7.2.0', 'v7.4.0'},
    )


def test_included_if_all_labels_are_greater():
    assert not dr.is_already_released(
        target_version='v7.3.0',
        ticket_labels={'v7.4.0', 'v7.5.0'},
    )


def test_included_if_labeled_w_target_version():
    assert not dr.is_already_released(
        target_version='v7.3.0',
        ticket_labels={'v7.3.0', 'release_note:dev_docs'},
    )


@pytest.mark.parametrize(
    'labels',
    [
        set(),
        frozenset(),
        ['release_note:dev_docs'],
        ['v7.2', 'v7.2.0.1', 'version-7.2.0', 'v7.2.0-beta1'],
        None,
    ],
)
def test_included_if_no_valid_release_labels(labels):
    assert not dr.is_already_released(target_version='v7.3.0', ticket_labels=labels)


@pytest.mark.parametrize(
    'lower,target,higher',
    [
        ('v7.9.0', 'v7.10.0', 'v7.11.0'),
        ('v6.8.12', 'v7.0.0', 'v8.0.0'),
        ('v7.10.1', 'v7.10.2', 'v7.10.10'),
        ('v0.9.0', 'v0.10.0', 'v10.0.0'),
    ],
)
def test_numeric_ordering(lower, target, higher):
    assert dr.is_already_released(target_version=target, ticket_labels=[lower, higher])
    assert dr.is_already_released(target_version=target, ticket_labels=[higher, lower])
    assert not dr.is_already_released(target_version=target, ticket_labels=[higher])
    assert not dr.is_already_released(target_version=target, ticket_labels=[target, higher])


def test_invalid_target_version():
    with pytest.raises(ValueError):
        dr.is_already_released(target_version='not-a-version', ticket_labels=['v7.2.0'])


def test_minor_release_labels():
    labels = [
        'v7.9.0',
        'v7.10.0',
        'v7.10.1',
        'v8.0.0',
        'release_note:dev_docs',
        'v7.10.0',
        'v6.8.0',
    ]

    assert dr.minor_release_labels(labels) == ['v8.0.0', 'v7.10.0', 'v7.9.0', 'v6.8.0']


def test_release_labels_w_leading_zeros_compare_numerically():
    assert dr.is_already_released(target_version='v7.3.0', ticket_labels={'v07.2.0'})
    assert not dr.is_already_released(target_version='v07.3.0', ticket_labels={'v7.3.0'})
    assert dr.minor_release_labels(['v7.9.0', 'v07.10.0']) == ['v07.10.0', 'v7.9.0']
