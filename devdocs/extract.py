import logging
import re

import devdocs.model as dm
import devdocs.utils as du

logger = logging.getLogger(__name__)


'''
matches the heading-text of the dev-docs heading, accepting the following variants
(case-insensitive): "Dev Docs", "Dev-Docs", "DevDocs", "Dev Doc"
'''
DEV_DOCS_MARKER = re.compile(r'dev[- ]?docs?\b', flags=re.IGNORECASE)

'''
ATX-style heading: one or more `#`, followed by whitespace (or nothing at all). Only matches
complete lines, so a `#` within text never counts as a heading.
'''
_heading_pattern = re.compile(r'^(?P<level>#+)(?:\s+(?P<title>.*?))?\s*$')


def heading_depth(line: str) -> int | None:
    '''
    returns the depth (count of leading `#`) of the given line, if it is a heading; None
    otherwise
    '''
    if not (match := _heading_pattern.match(line)):
        return None
    return len(match.group('level'))


def _marker_pattern(marker_pattern: re.Pattern | str) -> re.Pattern:
    if isinstance(marker_pattern, re.Pattern):
        return marker_pattern
    return re.compile(marker_pattern, flags=re.IGNORECASE)


def _find_marker_heading(
    lines: list[str],
    marker_pattern: re.Pattern,
) -> tuple[int, int] | None:
    '''
    returns a tuple of (line-index, heading-depth) of the first heading matching the given
    marker pattern, or None if there is no such heading
    '''
    for idx, line in enumerate(lines):
        if not (match := _heading_pattern.match(line)):
            continue
        title = match.group('title') or ''
        if marker_pattern.match(title):
            return idx, len(match.group('level'))

    return None


def _find_bounding_heading(
    lines: list[str],
    start: int,
    max_depth: int,
) -> int:
    '''
    returns the index of the first line (at or after `start`) that is a heading of a depth of
    at most `max_depth`. If there is no such line, the amount of lines is returned.
    '''
    for idx in range(start, len(lines)):
        depth = heading_depth(lines[idx])
        if depth is not None and depth <= max_depth:
            return idx

    return len(lines)


def extract(
    document: str | None,
    marker_pattern: re.Pattern | str=DEV_DOCS_MARKER,
) -> dm.Section | None:
    '''
    extracts the section below the first heading matching `marker_pattern` from the given
    (markdown) document.

    The section ends before the next heading of the same or a lower depth (i.e. a sibling or
    parent section); sub-sections (headings of greater depth) are part of the returned section.
    If there is no such heading, the section extends to the end of the document.

    Returns None if the document does not contain a heading matching `marker_pattern`.
    '''
    if not document:
        return None

    marker_pattern = _marker_pattern(marker_pattern)
    lines = du.normalise_line_endings(document).split('\n')

    if not (marker := _find_marker_heading(lines, marker_pattern)):
        return None

    marker_idx, depth = marker
    start = marker_idx + 1
    end = _find_bounding_heading(lines, start=start, max_depth=depth)

    logger.debug(f'found section {depth=} spanning lines {start}..{end}')

    return dm.Section(
        heading_depth=depth,
        text='\n'.join(lines[start:end]).strip(),
    )


def extract_content(
    document: str | None,
    marker_pattern: re.Pattern | str=DEV_DOCS_MARKER,
) -> str | None:
    if not (section := extract(document, marker_pattern=marker_pattern)):
        return None
    return section.text
