import pytest

from tag_validator.utils.location_resolver import LocationResolver


@pytest.mark.parametrize("content, offset, line, column", [
    ("abc", 0, 1, 0),
    ("abc", 2, 1, 2),
    ("ab\ncd", 3, 2, 0),
    ("ab\ncd", 4, 2, 1),
    ("\n\n", 2, 3, 0),
    ("<div>\r\n<p>", 7, 2, 0),
])
def test_resolve(content, offset, line, column):
    position = LocationResolver.resolve(content, offset)
    assert (position.offset, position.line, position.column) == (offset, line, column)


def test_resolve_matches_manual_count():
    content = "<html>\n  <body>\n\n    <div class='a'>x</div>\n</html>"
    for offset in range(len(content) + 1):
        before = content[:offset]
        expected_line = before.count('\n') + 1
        expected_column = len(before.split('\n')[-1])
        position = LocationResolver.resolve(content, offset)
        assert position.line == expected_line
        assert position.column == expected_column


def test_resolve_rejects_offset_outside_document():
    with pytest.raises(ValueError):
        LocationResolver.resolve("abc", 4)


def test_format_location():
    position = LocationResolver.resolve("a\nbc", 3)
    assert LocationResolver.format_location(position) == "Line 2, column 1"
