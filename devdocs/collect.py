import logging
import re
import typing

import devdocs.extract as de
import devdocs.model as dm
import devdocs.releases as dr
import devdocs.utils as du

logger = logging.getLogger(__name__)


def excerpt_for_ticket(
    ticket: dm.Ticket,
    marker_pattern: re.Pattern | str=de.DEV_DOCS_MARKER,
) -> dm.Excerpt:
    body = du.clean_body(ticket.body)

    return dm.Excerpt(
        pr=ticket.number,
        state=ticket.state,
        title=du.clean_title(ticket.title),
        text=de.extract_content(body, marker_pattern=marker_pattern),
    )


def iter_unreleased(
    tickets: typing.Iterable[dm.Ticket],
    target_version: str,
) -> typing.Generator[dm.Ticket, None, None]:
    for ticket in tickets:
        if dr.is_already_released(
            target_version=target_version,
            ticket_labels=ticket.labels,
        ):
            logger.info(
                f'skipping #{ticket.number} - already released w/ an earlier version '
                f'({", ".join(dr.release_labels(ticket.labels))})'
            )
            continue
        yield ticket


def collect_excerpts(
    tickets: typing.Iterable[dm.Ticket],
    target_version: str,
    marker_pattern: re.Pattern | str=de.DEV_DOCS_MARKER,
) -> list[dm.Excerpt]:
    '''
    returns the excerpts for all tickets that were not yet released with a release prior to
    `target_version`, preserving the order of the given tickets.

    Tickets w/o dev-docs section are included as "broken" excerpts (w/o text). Each ticket is
    processed independently; if processing a ticket fails, it is reported as broken, rather
    than aborting processing of the remaining tickets.

    @raises ValueError: if target_version is not a valid version
    '''
    # fail early (before consuming tickets) for invalid versions
    dr.is_already_released(target_version=target_version, ticket_labels=())

    excerpts = []
    for ticket in iter_unreleased(tickets, target_version=target_version):
        try:
            excerpt = excerpt_for_ticket(ticket, marker_pattern=marker_pattern)
        except Exception as e:
            logger.warning(f'failed to extract dev-docs from #{ticket.number}: {e}')
            excerpt = dm.Excerpt(
                pr=ticket.number,
                state=ticket.state,
                title=ticket.title or '',
                text=None,
            )

        if excerpt.is_broken:
            logger.warning(f'#{ticket.number} is labeled, but lacks a dev-docs section')

        excerpts.append(excerpt)

    logger.info(f'collected {len(excerpts)} excerpts for {target_version=}')
    return excerpts
