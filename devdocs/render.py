import functools
import logging
import typing

import devdocs.asciidoc
import devdocs.model as dm

logger = logging.getLogger(__name__)

# heading level of AsciiDoc entries (`===`), excerpt headings are nested below
_entry_heading_level = 3


def _starts_with_heading(text: str) -> bool:
    return text.strip().startswith('#')


def markdown_entry(
    excerpt: dm.Excerpt,
    repo: dm.RepoRef,
) -> str:
    '''
    renders the given excerpt as markdown. Unless the excerpt starts with a heading itself, the
    title of the pull request is used as heading.
    '''
    lines = []
    if not _starts_with_heading(excerpt.text):
        lines.append(f'## {excerpt.title}\n')

    lines.append(f'{excerpt.text}\n')
    lines.append(f'*via [#{excerpt.pr}]({repo.pull_url(excerpt.pr)})*')

    return '\n'.join(lines)


def asciidoc_entry(
    excerpt: dm.Excerpt,
    repo: dm.RepoRef,
    converter: devdocs.asciidoc.Converter | None=None,
    layout: dm.Layout=dm.Layout.HEADING,
) -> str:
    if not converter:
        converter = functools.partial(
            devdocs.asciidoc.convert,
            heading_offset=_entry_heading_level,
        )

    text = converter(excerpt.text).strip()
    reference = f'via {repo.pull_url(excerpt.pr)}[#{excerpt.pr}]'
    anchor = f'[[{repo.name}-pr-{excerpt.pr}]]'

    layout = dm.Layout(layout)
    if layout is dm.Layout.HEADING:
        return '\n'.join((
            '[discrete]',
            anchor,
            f'{"=" * _entry_heading_level} {excerpt.title}',
            '',
            text,
            '',
            f'*{reference}*',
        ))
    elif layout is dm.Layout.COLLAPSIBLE:
        return '\n'.join((
            anchor,
            f'.{excerpt.title}',
            '[%collapsible]',
            '====',
            text,
            '',
            f'*{reference}*',
            '====',
        ))
    else:
        raise NotImplementedError(layout)


def render(
    excerpts: typing.Iterable[dm.Excerpt],
    repo: dm.RepoRef,
    dialect: dm.Dialect=dm.Dialect.MARKDOWN,
    layout: dm.Layout=dm.Layout.HEADING,
    converter: devdocs.asciidoc.Converter | None=None,
) -> str:
    '''
    joins the given excerpts (in the given order) into one document. Broken excerpts (those w/o
    text) are skipped.

    @param converter: markup-converter for the AsciiDoc dialect (defaults to
                      `devdocs.asciidoc.convert`, w/ headings nested below the entry heading)
    '''
    dialect = dm.Dialect(dialect)

    if dialect is dm.Dialect.MARKDOWN:
        def render_entry(excerpt):
            return markdown_entry(excerpt, repo=repo)
    elif dialect is dm.Dialect.ASCIIDOC:
        def render_entry(excerpt):
            return asciidoc_entry(excerpt, repo=repo, converter=converter, layout=layout)
    else:
        raise NotImplementedError(dialect)

    entries = [
        render_entry(excerpt)
        for excerpt in excerpts
        if not excerpt.is_broken
    ]

    return '\n\n'.join(entries)


def render_broken(
    excerpts: typing.Iterable[dm.Excerpt],
    repo: dm.RepoRef,
) -> str | None:
    '''
    renders a (markdown) list of pull requests that were labeled, but lack a dev-docs section
    '''
    lines = [
        f'- [#{e.pr}]({repo.pull_url(e.pr)}) {e.title}'
        for e in excerpts
        if e.is_broken
    ]
    if not lines:
        return None

    return '\n'.join((
        'The following PRs were labeled, but do not have a Dev Docs section:',
        '',
        *lines,
    ))


def no_excerpts_hint(label: str=dm.DEV_DOCS_LABEL) -> str:
    return (
        'No pull requests or issues have been labeled for the selected version, yet.\n\n'
        f'To add content to the dev docs, attach the `{label}` label to a pull request or '
        'issue, and add the content below a `# Dev Docs` heading in its description.'
    )
