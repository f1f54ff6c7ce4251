import devdocs.utils as du


def test_strip_html_comments():
    assert du.strip_html_comments('a<!-- b -->c') == 'ac'
    assert du.strip_html_comments('a<!-- b -->c<!--\nd\n-->e') == 'ace'
    assert du.strip_html_comments('no comments') == 'no comments'


def test_strip_html_comments_keeps_unterminated_comment():
    assert du.strip_html_comments('a<!-- unterminated') == 'a<!-- unterminated'
    assert du.strip_html_comments('a<!-- b -->c `<!--` d') == 'ac `<!--` d'


def test_clean_body():
    assert du.clean_body(None) == ''
    assert du.clean_body('a\r\nb<!-- template -->\r\n') == 'a\nb\n'


def test_clean_title():
    assert du.clean_title('[Lens] [Discover]  Fix the\nthing ') == '[Lens] [Discover] Fix the thing'
    assert du.clean_title(None) == ''
