# tag.py

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r'\s')


@dataclass(frozen=True)
class Position:
    """Location of a tag in the document"""
    offset: int  # 0-based character index
    line: int    # 1-based
    column: int  # 0-based, reset at each line break

    def __str__(self):
        return f"line {self.line}, col {self.column}"


@dataclass(frozen=True)
class Tag:
    """A start tag, end tag or declaration found in the markup"""
    raw: str
    name: str
    position: Position

    @classmethod
    def from_raw(cls, raw: str, position: Position) -> 'Tag':
        """Build a tag, deriving its name from the bracketed text"""
        return cls(raw=raw, name=derive_name(raw), position=position)

    @property
    def is_end_tag(self) -> bool:
        return self.name.startswith('/')

    @property
    def is_self_closing(self) -> bool:
        return self.raw.endswith('/>')

    def __str__(self):
        return f"<{self.name}>, {self.position}"


def derive_name(raw: str) -> str:
    """
    Derive the tag name from its raw text.

    End tags keep their leading slash ('</div>' -> '/div'). Start tags end at
    the first whitespace character, so whitespace directly after the '<'
    gives an empty name. Without any whitespace the name is everything
    between the brackets ('<br/>' -> 'br/').

    Args:
        raw: Bracketed tag text, e.g. '<div class="x">'

    Returns:
        Tag name
    """
    if raw.startswith('</'):
        return raw[1:-1]

    match = _WHITESPACE.search(raw)
    if match and match.start() > 0:
        return raw[1:match.start()]
    return raw[1:-1]
