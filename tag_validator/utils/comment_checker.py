import re
from typing import List

from ..models import MessageLevel, MessageType, Tag, ValidateMessage, render_message
from .location_resolver import LocationResolver


class CommentChecker:
    """Report comment delimiters that have no counterpart"""

    OPEN_DELIMITER = '<!--'
    CLOSE_DELIMITER = '-->'

    def __init__(self):
        self.rules = [
            (self.OPEN_DELIMITER, MessageType.UNTERMINATED_COMMENT, "comment has no end delimiter"),
            (self.CLOSE_DELIMITER, MessageType.UNOPENED_COMMENT, "comment has no start delimiter"),
        ]

    def check_comments(self, file_path: str, html: str) -> List[ValidateMessage]:
        """
        Report every comment delimiter still visible in the text

        Balanced comments are blanked by the preprocessor, so whatever is left
        has no partner. Occurrences are reported one by one without pairing.

        Args:
            file_path: Path used as message prefix
            html: Document text after preprocessing

        Returns:
            List of ERROR messages, open delimiters first
        """
        messages = []
        for delimiter, message_type, description in self.rules:
            for match in re.finditer(re.escape(delimiter), html):
                position = LocationResolver.resolve(html, match.start())
                tag = Tag(raw=delimiter, name=delimiter.strip('<>'), position=position)
                messages.append(ValidateMessage(
                    level=MessageLevel.ERROR,
                    message_type=message_type,
                    message=render_message(file_path, MessageLevel.ERROR, description,
                                           f"{delimiter}, {position}"),
                    primary_tag=tag,
                ))
        return messages
