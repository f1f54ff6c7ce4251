import logging
import typing

import github3
import github3.issues.issue
import github3.search

import devdocs.model as dm
import devdocs.releases as dr

logger = logging.getLogger(__name__)


def search_query(
    repo: dm.RepoRef,
    label: str,
    version: str,
) -> str:
    return f'repo:{repo.full_name} label:"{label}" label:"{version}"'


def ticket_from_issue(issue: github3.issues.issue.ShortIssue) -> dm.Ticket:
    state = issue.state
    try:
        state = dm.TicketState(state)
    except ValueError:
        logger.warning(f'unexpected state {state=} for #{issue.number} - treating as open')
        state = dm.TicketState.OPEN

    return dm.Ticket(
        number=issue.number,
        state=state,
        title=issue.title or '',
        body=issue.body,
        labels=frozenset(l.name for l in (issue.original_labels or ())),
    )


def search_tickets(
    github_api: github3.GitHub,
    repo: dm.RepoRef,
    version: str,
    label: str=dm.DEV_DOCS_LABEL,
) -> typing.Generator[dm.Ticket, None, None]:
    '''
    yields all issues and pull requests from the given repository that carry both the given
    label and the given release label. Pagination is done by github3.
    '''
    query = search_query(repo=repo, label=label, version=version)
    logger.info(f'searching for issues: {query=}')

    for search_result in github_api.search_issues(query=query):
        search_result: github3.search.IssueSearchResult
        yield ticket_from_issue(search_result.issue)


def list_release_labels(
    github_api: github3.GitHub,
    repo: dm.RepoRef,
) -> list[str]:
    '''
    returns the minor release labels (e.g. `v7.10.0`) defined for the given repository,
    greatest version first
    '''
    repository = github_api.repository(
        owner=repo.owner,
        repository=repo.name,
    )
    labels = [label.name for label in repository.labels()]
    logger.info(f'found {len(labels)} labels for {repo.full_name}')

    return dr.minor_release_labels(labels)
