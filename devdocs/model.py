import dataclasses
import enum
import logging
import typing

logger = logging.getLogger(__name__)


DEV_DOCS_LABEL = 'release_note:dev_docs'
GITHUB_URL = 'https://github.com'


class TicketState(enum.StrEnum):
    OPEN = 'open'
    CLOSED = 'closed'


class Dialect(enum.StrEnum):
    MARKDOWN = 'markdown'
    ASCIIDOC = 'asciidoc'


class Layout(enum.StrEnum):
    '''
    controls how each excerpt is wrapped when joining excerpts into one document
    '''
    HEADING = 'heading'
    COLLAPSIBLE = 'collapsible'


@dataclasses.dataclass(frozen=True)
class RepoRef:
    owner: str
    name: str
    github_url: str = GITHUB_URL

    @staticmethod
    def parse(repo: str, github_url: str=GITHUB_URL) -> typing.Self:
        '''
        parses a repository reference of the form `<owner>/<name>`
        '''
        owner, sep, name = repo.strip().strip('/').partition('/')
        if not sep or not owner or not name or '/' in name:
            raise ValueError(f'expected repository in the form <owner>/<name>, got {repo=}')
        return RepoRef(owner=owner, name=name, github_url=github_url.rstrip('/'))

    @property
    def full_name(self) -> str:
        return f'{self.owner}/{self.name}'

    def pull_url(self, number: int) -> str:
        return f'{self.github_url}/{self.full_name}/pull/{number}'


@dataclasses.dataclass(frozen=True, kw_only=True)
class Ticket:
    '''
    an issue or pull request, as returned from issue-search

    `labels` contains all label names (release labels, as well as arbitrary other labels).
    '''
    number: int
    state: TicketState
    title: str
    body: str | None
    labels: frozenset[str] = frozenset()

    @property
    def is_closed(self) -> bool:
        return self.state is TicketState.CLOSED


@dataclasses.dataclass(frozen=True)
class Section:
    heading_depth: int
    text: str


@dataclasses.dataclass(frozen=True, kw_only=True)
class Excerpt:
    pr: int
    state: TicketState
    title: str
    text: str | None

    @property
    def is_broken(self) -> bool:
        '''
        a ticket was labeled, but did not contain a (non-empty) dev-docs section
        '''
        return not self.text

    @property
    def is_closed(self) -> bool:
        return self.state is TicketState.CLOSED


@dataclasses.dataclass(frozen=True)
class StateSummary:
    closed: int
    total: int

    def __str__(self):
        return f'{self.closed} of {self.total}'


def filter_by_state(
    excerpts: typing.Iterable[Excerpt],
    only_closed: bool=True,
) -> list[Excerpt]:
    excerpts = list(excerpts)
    if not only_closed:
        return excerpts

    return [e for e in excerpts if e.is_closed]


def state_summary(excerpts: typing.Iterable[Excerpt]) -> StateSummary:
    excerpts = list(excerpts)
    return StateSummary(
        closed=sum(1 for e in excerpts if e.is_closed),
        total=len(excerpts),
    )


def split_broken(
    excerpts: typing.Iterable[Excerpt],
) -> tuple[list[Excerpt], list[Excerpt]]:
    '''
    returns a tuple of documented excerpts first, and broken excerpts second (preserving order)
    '''
    documented = []
    broken = []

    for excerpt in excerpts:
        if excerpt.is_broken:
            broken.append(excerpt)
        else:
            documented.append(excerpt)

    return documented, broken
