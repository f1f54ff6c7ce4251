import logging
import typing

import version

logger = logging.getLogger(__name__)


def release_labels(labels: typing.Iterable[str]) -> list[str]:
    '''
    returns those of the given labels that are release labels (strict `vMAJOR.MINOR.PATCH`)
    '''
    return [label for label in labels if version.is_release_label(label)]


def is_already_released(
    target_version: str,
    ticket_labels: typing.Iterable[str],
) -> bool:
    '''
    checks whether a ticket was already published with a release prior to `target_version`.

    This is the case if any of the ticket's release labels is (according to semver arithmetics)
    smaller than `target_version`. Tickets w/o release labels (or carrying only release labels
    equal to or greater than `target_version`) are considered to not have been released, yet.

    Note that it is not checked whether a document was actually published for the smaller
    release; the presence of the release label suffices.

    @raises ValueError: if target_version is not a valid version
    '''
    target_semver = version.parse_to_semver(target_version)

    for label in release_labels(ticket_labels or ()):
        if not (label_semver := version.parse_to_semver(label, invalid_semver_ok=True)):
            continue
        if label_semver < target_semver:
            logger.debug(f'{label=} is a predecessor of {target_version=}')
            return True

    return False


def minor_release_labels(labels: typing.Iterable[str]) -> list[str]:
    '''
    returns the minor release labels (`vMAJOR.MINOR.0`) contained in the given labels, greatest
    version first. Dev-docs documents are compiled for minor releases only.
    '''
    return version.sort_versions(
        (label for label in set(labels) if version.is_minor_release_label(label)),
        descending=True,
    )
