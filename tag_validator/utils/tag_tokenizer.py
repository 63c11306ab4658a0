import re
from typing import Iterator

from ..models import Tag
from .location_resolver import LocationResolver


class TagTokenizer:
    """Extract tag tokens from masked markup"""

    def __init__(self):
        self.tag_pattern = re.compile(r'<[^>]+>')
        self.script_close_pattern = re.compile(r'</script\s*>$', re.IGNORECASE)

    def tokenize(self, masked_html: str) -> Iterator[Tag]:
        """
        Yield every tag of the document in order

        Args:
            masked_html: Document text after preprocessing

        Yields:
            Tag tokens positioned at the start of their match
        """
        for match in self.tag_pattern.finditer(masked_html):
            tag_html = self._trim(match.group())
            if self._is_skipped(tag_html):
                continue

            position = LocationResolver.resolve(masked_html, match.start())
            yield Tag.from_raw(tag_html, position)

    @staticmethod
    def _trim(tag_html: str) -> str:
        """Drop a stray leading '>' or trailing '<'"""
        if tag_html.startswith('>'):
            tag_html = tag_html[1:]
        if tag_html.endswith('<'):
            tag_html = tag_html[:-1]
        return tag_html

    def _is_skipped(self, tag_html: str) -> bool:
        """Empty matches, template openers and script tags are not tokens"""
        if not tag_html:
            return True

        lowered = tag_html.lower()
        return (tag_html.startswith('<%')
                or lowered.startswith('<script')
                or self.script_close_pattern.search(tag_html) is not None)
