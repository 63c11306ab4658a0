import pytest

from tag_validator import HtmlTagValidator
from tag_validator.models import Position, Tag


@pytest.fixture
def validator():
    return HtmlTagValidator(quiet=True)


@pytest.fixture
def make_tag():
    """Build a tag at a given line without a backing document"""
    def _make(raw: str, line: int = 1, column: int = 0, offset: int = 0) -> Tag:
        return Tag.from_raw(raw, Position(offset=offset, line=line, column=column))
    return _make


@pytest.fixture
def markup_tree(tmp_path):
    """A small web app tree with valid, broken and ignored files"""
    files = {
        'good.html': '<html><body><p>ok</p></body></html>',
        'bad.jsp': '<div>\n<p>text</div>\n',
        'notes.txt': '<div>',
        'sub/nested.htm': '<ul>\n  <li>one</li>\n',
    }
    for name, content in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    return tmp_path
