import pytest

from tag_validator.utils.markup_preprocessor import MarkupPreprocessor


@pytest.fixture
def preprocessor():
    return MarkupPreprocessor()


def test_comment_is_blanked_keeping_line_breaks(preprocessor):
    assert preprocessor.mask("<!-- a\r\nb -->x") == " " * 6 + "\r\n" + " " * 5 + "x"


@pytest.mark.parametrize("html", [
    "",
    "<div></div>",
    "<!-- one --><p><!-- two\nlines --></p>",
    "<div>\n<!--\n<span>\n-->\n</div>\n",
    "<% if (a > b) { %>\n<b>x</b>\n<% } %>",
    "<%-- note\n --%><i></i>",
])
def test_mask_preserves_length_and_line_breaks(preprocessor, html):
    masked = preprocessor.mask(html)
    assert len(masked) == len(html)
    assert [i for i, c in enumerate(masked) if c in '\r\n'] == [i for i, c in enumerate(html) if c in '\r\n']


def test_identical_comments_are_all_masked(preprocessor):
    assert preprocessor.mask("<!--x--><a><!--x-->") == " " * 8 + "<a>" + " " * 8


def test_unterminated_comment_is_left_alone(preprocessor):
    assert preprocessor.mask("<!-- unterminated") == "<!-- unterminated"


def test_template_block_is_blanked(preprocessor):
    assert preprocessor.mask("<%= user %><b>") == " " * 11 + "<b>"


def test_template_comment_holding_block_end_is_blanked_whole(preprocessor):
    html = "<%-- <% x %> <div> --%><p>"
    assert preprocessor.mask(html) == " " * (len(html) - 3) + "<p>"


def test_script_body_is_blanked_but_tags_kept(preprocessor):
    assert preprocessor.mask("<script>a<b</script>") == "<script>   </script>"
    assert preprocessor.mask('<SCRIPT type="x">if(a>b){}</SCRIPT >') == '<SCRIPT type="x">         </SCRIPT >'


def test_self_closed_script_has_no_body(preprocessor):
    html = '<script src="a.js"/><p></p><script>x</script>'
    assert preprocessor.mask(html) == '<script src="a.js"/><p></p><script> </script>'


def test_blank_keeps_only_crlf():
    assert MarkupPreprocessor.blank("a\r\nb\tc") == " \r\n   "
