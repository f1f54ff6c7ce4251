import pytest

import devdocs.model as dm


def _excerpt(pr: int, state=dm.TicketState.CLOSED, text='docs') -> dm.Excerpt:
    return dm.Excerpt(pr=pr, state=state, title=f'title {pr}', text=text)


def test_filter_by_state():
    excerpts = [
        _excerpt(1),
        _excerpt(2, state=dm.TicketState.OPEN),
        _excerpt(3),
    ]

    assert [e.pr for e in dm.filter_by_state(excerpts)] == [1, 3]
    assert [e.pr for e in dm.filter_by_state(excerpts, only_closed=False)] == [1, 2, 3]


def test_state_summary():
    excerpts = [
        _excerpt(1),
        _excerpt(2, state=dm.TicketState.OPEN),
        _excerpt(3, text=None),
    ]

    summary = dm.state_summary(excerpts)

    assert summary == dm.StateSummary(closed=2, total=3)
    assert str(summary) == '2 of 3'


def test_split_broken():
    excerpts = [
        _excerpt(1),
        _excerpt(2, text=None),
        _excerpt(3, text=''),
        _excerpt(4),
    ]

    documented, broken = dm.split_broken(excerpts)

    assert [e.pr for e in documented] == [1, 4]
    assert [e.pr for e in broken] == [2, 3]


def test_repo_ref_parse():
    repo = dm.RepoRef.parse('elastic/kibana')

    assert repo.owner == 'elastic'
    assert repo.name == 'kibana'
    assert repo.full_name == 'elastic/kibana'
    assert repo.pull_url(42) == 'https://github.com/elastic/kibana/pull/42'

    enterprise_repo = dm.RepoRef.parse('org/repo', github_url='https://github.example.com/')
    assert enterprise_repo.pull_url(1) == 'https://github.example.com/org/repo/pull/1'


@pytest.mark.parametrize('repo', ['kibana', 'elastic/', '/kibana', 'a/b/c', ''])
def test_repo_ref_parse_invalid(repo):
    with pytest.raises(ValueError):
        dm.RepoRef.parse(repo)


def test_ticket_state():
    ticket = dm.Ticket(number=1, state=dm.TicketState('closed'), title='', body=None)

    assert ticket.is_closed
    assert ticket.labels == frozenset()
