from ..models import Position


class LocationResolver:
    """Utility class for mapping character offsets to line and column"""

    @staticmethod
    def resolve(content: str, offset: int) -> Position:
        """
        Resolve an offset into a position

        Line is one plus the number of line feeds strictly before the offset,
        column is the distance from the last of those line feeds.

        Args:
            content: Full document text
            offset: 0-based character index into content

        Returns:
            Position with 1-based line and 0-based column
        """
        if offset < 0 or offset > len(content):
            raise ValueError(f"Offset {offset} outside document of length {len(content)}")

        line = content.count('\n', 0, offset) + 1
        column = offset - (content.rfind('\n', 0, offset) + 1)
        return Position(offset=offset, line=line, column=column)

    @staticmethod
    def format_location(position: Position) -> str:
        """
        Format a position for reports

        Args:
            position: Resolved position

        Returns:
            Formatted location string
        """
        return f"Line {position.line}, column {position.column}"
