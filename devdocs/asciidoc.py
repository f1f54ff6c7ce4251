'''
Conversion of (GitHub-flavoured) markdown into AsciiDoc.

The conversion is a line-based text substitution covering the constructs commonly used in
pull request descriptions (headings, emphasis, inline code, links, images, fenced code blocks,
lists, block quotes, and thematic breaks). Constructs not listed are passed through unchanged.
'''
import logging
import re
import typing

logger = logging.getLogger(__name__)

Converter = typing.Callable[[str], str]

_fence_pattern = re.compile(r'^\s*(?P<fence>`{3,}|~{3,})\s*(?P<lang>[\w+#.-]*).*$')
_heading_pattern = re.compile(r'^(?P<level>#{1,6})\s+(?P<title>.*?)(?:\s+#+)?\s*$')
_thematic_break_pattern = re.compile(r'^\s{0,3}(?:\*{3,}|-{3,}|_{3,})\s*$')
_unordered_item_pattern = re.compile(r'^(?P<indent>\s*)[-*+]\s+(?P<text>.*)$')
_ordered_item_pattern = re.compile(r'^(?P<indent>\s*)\d+[.)]\s+(?P<text>.*)$')
_quote_pattern = re.compile(r'^\s{0,3}>\s?(?P<text>.*)$')

_code_span_pattern = re.compile(r'(?P<ticks>`+)(?P<code>.+?)(?P=ticks)')
_image_pattern = re.compile(r'!\[(?P<alt>[^\]]*)\]\((?P<url>[^)\s]+)(?:\s+"[^"]*")?\)')
_link_pattern = re.compile(r'\[(?P<text>[^\]]+)\]\((?P<url>[^)\s]+)(?:\s+"[^"]*")?\)')
_autolink_pattern = re.compile(r'<(?P<url>https?://[^>\s]+)>')
_bold_pattern = re.compile(r'(\*\*|__)(?P<text>\S(?:.*?\S)?)\1')
_italic_pattern = re.compile(r'(?<![*\w])\*(?![*\s])(?P<text>.+?)(?<![*\s])\*(?![*\w])')
_strikethrough_pattern = re.compile(r'~~(?P<text>\S(?:.*?\S)?)~~')

_list_indent_width = 2
_max_heading_level = 6


def _link(match: re.Match) -> str:
    url = match.group('url')
    text = match.group('text')
    if re.match(r'^[a-z][a-z0-9+.-]*://', url, flags=re.IGNORECASE):
        return f'{url}[{text}]'
    return f'link:{url}[{text}]'


def _convert_text(text: str) -> str:
    text = _image_pattern.sub(lambda m: f'image:{m.group("url")}[{m.group("alt")}]', text)
    text = _link_pattern.sub(_link, text)
    text = _autolink_pattern.sub(lambda m: m.group('url'), text)
    # italics first, as `*` is the bold-marker in AsciiDoc
    text = _italic_pattern.sub(lambda m: f'_{m.group("text")}_', text)
    text = _bold_pattern.sub(lambda m: f'*{m.group("text")}*', text)
    text = _strikethrough_pattern.sub(lambda m: f'[.line-through]#{m.group("text")}#', text)
    return text


def convert_inline(line: str) -> str:
    '''
    converts inline markup of the given line. Contents of code spans are left untouched.
    '''
    parts = []
    pos = 0
    for match in _code_span_pattern.finditer(line):
        parts.append(_convert_text(line[pos:match.start()]))
        parts.append(f'`{match.group("code")}`')
        pos = match.end()
    parts.append(_convert_text(line[pos:]))

    return ''.join(parts)


def _list_level(indent: str) -> int:
    indent = indent.replace('\t', ' ' * _list_indent_width)
    return len(indent) // _list_indent_width + 1


def convert(
    text: str | None,
    heading_offset: int=0,
) -> str:
    '''
    converts the given markdown text into AsciiDoc

    @param heading_offset: number of levels headings are shifted by (`#` maps to `=` if
                           not set). Shifted headings are emitted as discrete headings, so
                           they may be embedded below other headings or within blocks.
    '''
    if not text:
        return ''

    lines = text.replace('\r\n', '\n').split('\n')
    out = []

    open_fence = None
    in_quote = False

    for line in lines:
        if open_fence:
            if line.strip().startswith(open_fence) and not line.strip().strip(open_fence[0]):
                out.append('----')
                open_fence = None
            else:
                out.append(line)
            continue

        if (quote_match := _quote_pattern.match(line)):
            if not in_quote:
                out.append('____')
                in_quote = True
            out.append(convert_inline(quote_match.group('text')))
            continue
        elif in_quote:
            out.append('____')
            in_quote = False

        if (fence_match := _fence_pattern.match(line)):
            open_fence = fence_match.group('fence')
            if lang := fence_match.group('lang'):
                out.append(f'[source,{lang}]')
            out.append('----')
            continue

        if (heading_match := _heading_pattern.match(line)):
            level = min(len(heading_match.group('level')) + heading_offset, _max_heading_level)
            if heading_offset:
                out.append('[discrete]')
            out.append(f'{"=" * level} {convert_inline(heading_match.group("title"))}')
            continue

        if _thematic_break_pattern.match(line):
            out.append("'''")
            continue

        if (item_match := _unordered_item_pattern.match(line)):
            level = _list_level(item_match.group('indent'))
            out.append(f'{"*" * level} {convert_inline(item_match.group("text"))}')
            continue

        if (item_match := _ordered_item_pattern.match(line)):
            level = _list_level(item_match.group('indent'))
            out.append(f'{"." * level} {convert_inline(item_match.group("text"))}')
            continue

        out.append(convert_inline(line))

    if in_quote:
        out.append('____')
    if open_fence:
        logger.warning('unterminated code block - closing it at end of text')
        out.append('----')

    return '\n'.join(out)
