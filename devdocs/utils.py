import logging
import re

logger = logging.getLogger(__name__)

_whitespace_pattern = re.compile(r'\s+')


def normalise_line_endings(content: str) -> str:
    return content.replace('\r\n', '\n').replace('\r', '\n')


def strip_html_comments(content: str) -> str:
    '''
    removes all `<!-- ... -->` comments (as typically contained in pull request templates).
    An unterminated `<!--` (e.g. mentioned within inline code) is kept, along with the
    remainder of the given content.
    '''
    stripped = ''
    while (comment_start_idx := content.find('<!--')) != -1:
        comment_stop_idx = content.find('-->', comment_start_idx + len('<!--'))
        if comment_stop_idx == -1:
            logger.warning('found unterminated html comment - keeping it as is')
            break
        stripped += content[:comment_start_idx]
        content = content[comment_stop_idx + len('-->'):]

    return stripped + content


def clean_body(body: str | None) -> str:
    if not body:
        return ''
    return strip_html_comments(normalise_line_endings(body))


def clean_title(title: str | None) -> str:
    '''
    returns the given title w/ collapsed whitespace (titles may contain line breaks)
    '''
    if not title:
        return ''

    return _whitespace_pattern.sub(' ', title).strip()
