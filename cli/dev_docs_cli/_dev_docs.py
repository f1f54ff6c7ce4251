import logging
import sys

import ccc.github
import ci.util
import ctx
import devdocs.asciidoc
import devdocs.collect
import devdocs.extract
import devdocs.fetch
import devdocs.model as dm
import devdocs.releases
import devdocs.render
import version as version_util

logger = logging.getLogger(__name__)

__cmd_name__ = 'dev_docs'


def _repo_ref(repo: str | None) -> dm.RepoRef:
    cfg = ctx.cfg
    if not (repo := repo or cfg.dev_docs.repo):
        ci.util.fail('must either pass --repo, or configure dev_docs.repo (or set DEV_DOCS_REPO)')

    try:
        return dm.RepoRef.parse(repo, github_url=cfg.github.http_url)
    except ValueError as ve:
        ci.util.fail(str(ve))


def _write(content: str, outfile: str):
    if outfile == '-':
        sys.stdout.write(content + '\n')
        sys.stdout.flush()
        return

    with open(outfile, 'w') as f:
        f.write(content + '\n')
    logger.info(f'wrote {outfile=}')


def collect(
    version: str,
    repo: str=None,
    label: str=None,
    dialect: dm.Dialect=None,
    layout: dm.Layout=None,
    include_open: bool=False,
    outfile: str='-',
):
    '''
    collects the dev-docs for the given release label (e.g. v7.10.0) and writes them as one
    document. Pull requests lacking a dev-docs section are reported on stderr.
    '''
    cfg = ctx.cfg.dev_docs
    repo_ref = _repo_ref(repo)
    label = label or cfg.label
    dialect = dialect or cfg.dialect
    layout = layout or cfg.layout
    only_closed = cfg.only_closed and not include_open

    if not version_util.is_release_label(version):
        ci.util.fail(f'not a valid release label (expected vMAJOR.MINOR.PATCH): {version=}')

    tickets = devdocs.fetch.search_tickets(
        github_api=ccc.github.github_api(ctx.cfg.github),
        repo=repo_ref,
        version=version,
        label=label,
    )
    excerpts = devdocs.collect.collect_excerpts(
        tickets=tickets,
        target_version=version,
    )

    summary = dm.state_summary(excerpts)
    logger.info(f'closed issues/PRs: {summary}')

    if not excerpts:
        ci.util.info(devdocs.render.no_excerpts_hint(label=label))
        return

    excerpts = dm.filter_by_state(excerpts, only_closed=only_closed)
    documented, broken = dm.split_broken(excerpts)

    if broken_report := devdocs.render.render_broken(broken, repo=repo_ref):
        ci.util.warning(broken_report)

    if not documented:
        logger.warning('no excerpts left to render')
        return

    document = devdocs.render.render(
        excerpts=documented,
        repo=repo_ref,
        dialect=dialect,
        layout=layout,
    )
    _write(document, outfile=outfile)


def ls_versions(
    repo: str=None,
):
    '''
    lists the minor release labels of the given repository (greatest version first)
    '''
    repo_ref = _repo_ref(repo)
    for label in devdocs.fetch.list_release_labels(
        github_api=ccc.github.github_api(ctx.cfg.github),
        repo=repo_ref,
    ):
        print(label)


def extract(
    body_file: ci.util.CliHints.existing_file(help='file containing a pull request body'),
    marker: str=None,
    outfile: str='-',
):
    '''
    extracts the dev-docs section from the given file (e.g. a saved pull request body)
    '''
    with open(body_file) as f:
        document = f.read()

    marker_pattern = marker or devdocs.extract.DEV_DOCS_MARKER
    if not (section := devdocs.extract.extract(document, marker_pattern=marker_pattern)):
        ci.util.fail(f'no dev-docs heading found in {body_file=}')

    logger.info(f'found dev-docs section at heading-depth {section.heading_depth}')
    _write(section.text, outfile=outfile)


def check_released(
    version: str,
    label: [str]=None,
):
    '''
    checks whether a ticket w/ the given labels would be omitted from the dev-docs for the given
    release label (as it was already released w/ an earlier version)
    '''
    try:
        released = devdocs.releases.is_already_released(
            target_version=version,
            ticket_labels=label or (),
        )
    except ValueError as ve:
        ci.util.fail(str(ve))

    if released:
        print(f'excluded - already released before {version}')
    else:
        print(f'included in {version}')


def convert(
    infile: ci.util.CliHints.existing_file(help='markdown file to convert'),
    outfile: str='-',
):
    '''
    converts the given markdown file into AsciiDoc
    '''
    with open(infile) as f:
        content = f.read()

    _write(devdocs.asciidoc.convert(content), outfile=outfile)
