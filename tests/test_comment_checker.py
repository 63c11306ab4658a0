from tag_validator.models import MessageLevel, MessageType
from tag_validator.utils.comment_checker import CommentChecker


def test_no_delimiters_no_messages():
    assert CommentChecker().check_comments('page.html', '<div></div>') == []


def test_open_delimiter_reported():
    messages = CommentChecker().check_comments('page.html', '<p>\n  <!-- unterminated')
    assert len(messages) == 1
    message = messages[0]
    assert message.level == MessageLevel.ERROR
    assert message.message_type == MessageType.UNTERMINATED_COMMENT
    assert (message.primary_tag.position.line, message.primary_tag.position.column) == (2, 2)
    assert message.message == 'page.html [ERROR] comment has no end delimiter: <!--, line 2, col 2'


def test_close_delimiter_reported():
    messages = CommentChecker().check_comments('page.html', '<div></div> -->')
    assert [m.message_type for m in messages] == [MessageType.UNOPENED_COMMENT]
    assert messages[0].message == 'page.html [ERROR] comment has no start delimiter: -->, line 1, col 12'


def test_every_delimiter_is_reported_without_pairing():
    messages = CommentChecker().check_comments('page.html', '<!-- a --> <!-- b')
    assert [m.message_type for m in messages] == [
        MessageType.UNTERMINATED_COMMENT,
        MessageType.UNTERMINATED_COMMENT,
        MessageType.UNOPENED_COMMENT,
    ]
