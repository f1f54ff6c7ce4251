# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import os
import subprocess
import sys

# assumption: we reside exactly one directory below our sources
src_dir = os.path.abspath(
    os.path.join(
        os.path.dirname(__file__),
        os.pardir
    )
)
cli_py = os.path.join(src_dir, 'cli_gen.py')


def _run(*args, stdin: str | None=None, cwd: str | None=None):
    return subprocess.run(
        [sys.executable, cli_py, *args],
        input=stdin,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        universal_newlines=True,
        cwd=cwd,
    )


def test_smoke():
    # perform a very weak smoke-test:
    # test if a trivial sub-command can be run
    result = _run('-h')

    assert result.returncode == 0
    assert result.stdout.strip().startswith('usage: cli_gen.py')


def test_extract(tmp_path):
    body_file = tmp_path / 'body.md'
    body_file.write_text('## Summary\n\nfoo\n\n## Dev Docs\n\nbar\n\n## Testing\n\nbaz\n')

    result = _run('dev_docs', 'extract', '--body-file', str(body_file))

    assert result.returncode == 0, result.stderr
    assert result.stdout == 'bar\n'


def test_extract_not_found(tmp_path):
    body_file = tmp_path / 'body.md'
    body_file.write_text('## Summary\n\nfoo\n')

    result = _run('dev_docs', 'extract', '--body-file', str(body_file))

    assert result.returncode != 0
    assert 'no dev-docs heading found' in result.stderr


def test_check_released():
    result = _run(
        'dev_docs', 'check_released',
        '--version', 'v7.3.0',
        '--label', 'v7.2.0',
        '--label', 'v7.4.0',
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith('excluded')

    result = _run(
        'dev_docs', 'check_released',
        '--version', 'v7.3.0',
        '--label', 'v7.3.0',
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith('included')


def test_check_released_wo_labels():
    result = _run(
        'dev_docs', 'check_released',
        '--version', 'v07.3.0',
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith('included')
