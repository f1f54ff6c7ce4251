import dataclasses
import unittest.mock

import devdocs.fetch as df
import devdocs.model as dm


@dataclasses.dataclass
class LabelMock:
    name: str


@dataclasses.dataclass
class IssueMock:
    number: int
    state: str
    title: str | None
    body: str | None
    original_labels: list[LabelMock]


@dataclasses.dataclass
class SearchResultMock:
    issue: IssueMock


def _issue(number: int, state: str='closed', labels=('release_note:dev_docs', 'v7.3.0')):
    return IssueMock(
        number=number,
        state=state,
        title=f'title {number}',
        body='# Dev Docs\n\ndocs',
        original_labels=[LabelMock(name=l) for l in labels],
    )


def test_search_query():
    query = df.search_query(
        repo=dm.RepoRef.parse('elastic/kibana'),
        label='release_note:dev_docs',
        version='v7.3.0',
    )

    assert query == 'repo:elastic/kibana label:"release_note:dev_docs" label:"v7.3.0"'


def test_ticket_from_issue():
    ticket = df.ticket_from_issue(_issue(42, labels=('v7.2.0', 'v7.3.0')))

    assert ticket == dm.Ticket(
        number=42,
        state=dm.TicketState.CLOSED,
        title='title 42',
        body='# Dev Docs\n\ndocs',
        labels=frozenset(('v7.2.0', 'v7.3.0')),
    )


def test_ticket_from_issue_w_unexpected_state():
    issue = _issue(1, state='merged')
    issue.title = None
    issue.original_labels = None

    ticket = df.ticket_from_issue(issue)

    assert ticket.state is dm.TicketState.OPEN
    assert ticket.title == ''
    assert ticket.labels == frozenset()


def test_search_tickets():
    github_api = unittest.mock.Mock()
    github_api.search_issues.return_value = iter((
        SearchResultMock(issue=_issue(1)),
        SearchResultMock(issue=_issue(2, state='open')),
    ))

    tickets = list(df.search_tickets(
        github_api=github_api,
        repo=dm.RepoRef.parse('elastic/kibana'),
        version='v7.3.0',
    ))

    github_api.search_issues.assert_called_once_with(
        query='repo:elastic/kibana label:"release_note:dev_docs" label:"v7.3.0"',
    )
    assert [t.number for t in tickets] == [1, 2]
    assert [t.state for t in tickets] == [dm.TicketState.CLOSED, dm.TicketState.OPEN]


def test_list_release_labels():
    repository = unittest.mock.Mock()
    repository.labels.return_value = iter(
        LabelMock(name=name) for name in ('v7.9.0', 'bug', 'v7.10.0', 'v7.10.1', 'v8.0.0')
    )
    github_api = unittest.mock.Mock()
    github_api.repository.return_value = repository

    labels = df.list_release_labels(
        github_api=github_api,
        repo=dm.RepoRef.parse('elastic/kibana'),
    )

    github_api.repository.assert_called_once_with(owner='elastic', repository='kibana')
    assert labels == ['v8.0.0', 'v7.10.0', 'v7.9.0']
