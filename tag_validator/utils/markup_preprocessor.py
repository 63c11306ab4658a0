"""
Markup Preprocessor.

This module blanks out the regions of a document that must not be tokenized
as markup, keeping the document length and its line breaks intact so that
offsets found in the masked text map onto the original.
"""

import re


class MarkupPreprocessor:
    """
    Mask comments, template blocks and script bodies with blanks.

    Masking keeps carriage returns and line feeds and replaces every other
    character of a matched span with a single blank.
    """

    BLANK = ' '

    # <!-- ... -->, non-greedy, across lines
    HTML_COMMENT_PATTERN = re.compile(r'<!--[\s\S]*?-->')

    # <%-- ... --%> is tried before <% ... %> so a template comment holding
    # '%>' is consumed whole by one branch
    TEMPLATE_PATTERN = re.compile(r'<%--[\s\S]*?--%>|<%[\s\S]*?%>')

    # Body between <script ...> and </script>; the tags themselves stay.
    # A self-closed <script ... /> has no body and never opens one.
    SCRIPT_BODY_PATTERN = re.compile(
        r'(<script\b(?:[^>]*[^/>])?>)([\s\S]*?)(</script\s*>)', re.IGNORECASE)

    _NOT_CRLF = re.compile(r'[^\r\n]')

    def mask(self, html: str) -> str:
        """
        Mask every region that is not markup.

        Args:
            html: Raw document text

        Returns:
            Masked text with the same length and line breaks
        """
        html = self.mask_pattern(html, self.HTML_COMMENT_PATTERN)
        html = self.mask_pattern(html, self.TEMPLATE_PATTERN)
        html = self.mask_pattern(html, self.SCRIPT_BODY_PATTERN, group=2)
        return html

    def mask_pattern(self, html: str, pattern: re.Pattern, group: int = 0) -> str:
        """
        Blank all non-overlapping matches of a pattern.

        Args:
            html: Text to mask
            pattern: Compiled pattern to search for
            group: Match group to blank (0 blanks the whole match)

        Returns:
            Masked text
        """
        pieces = []
        last_end = 0
        for match in pattern.finditer(html):
            start, end = match.span(group)
            pieces.append(html[last_end:start])
            pieces.append(self.blank(match.group(group)))
            last_end = end
        pieces.append(html[last_end:])
        return ''.join(pieces)

    @classmethod
    def blank(cls, text: str) -> str:
        """Replace everything except CR/LF with blanks"""
        return cls._NOT_CRLF.sub(cls.BLANK, text)
