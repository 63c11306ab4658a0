"""
Validator Configuration.

This module provides the immutable configuration shared by every stage of
the tag validation pipeline: the void element vocabulary, the file
extensions the walker accepts and the default charset.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple, Union


class ValidatorDefaults:
    """
    Default values for tag validation.

    Void elements never take an end tag. XHTML requires the trailing '/',
    HTML 4.01 discourages it and HTML5 accepts both forms.
    """

    VOID_ELEMENTS = frozenset({
        'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img',
        'input', 'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
        '!doctype',
    })

    FILE_EXTENSIONS = ('htm', 'html', 'jsp')

    CHARSET = 'utf-8'


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable configuration injected into the validator components"""

    void_elements: FrozenSet[str] = ValidatorDefaults.VOID_ELEMENTS
    file_extensions: Tuple[str, ...] = ValidatorDefaults.FILE_EXTENSIONS
    charset: str = ValidatorDefaults.CHARSET

    def __post_init__(self):
        # Lookups are case-insensitive; store the vocabularies lower-cased.
        object.__setattr__(self, 'void_elements',
                           frozenset(name.lower() for name in self.void_elements))
        object.__setattr__(self, 'file_extensions',
                           tuple(ext.lower().lstrip('.') for ext in self.file_extensions))

    @classmethod
    def default(cls):
        """Create default configuration"""
        return cls()

    @classmethod
    def with_extensions(cls, extensions: Optional[Iterable[str]], charset: Optional[str] = None):
        """
        Create configuration for a custom extension allow-list.

        Args:
            extensions: File extensions to accept. None or empty keeps the defaults
            charset: Charset used to load files. None keeps the default

        Returns:
            ValidatorConfig instance
        """
        extensions = tuple(extensions or ())
        return cls(
            file_extensions=extensions or ValidatorDefaults.FILE_EXTENSIONS,
            charset=charset or ValidatorDefaults.CHARSET,
        )

    def validate(self):
        """Validate configuration settings"""
        if not self.file_extensions:
            raise ValueError("At least one file extension must be configured")

        if any(not ext for ext in self.file_extensions):
            raise ValueError(f"File extensions must not be empty: {self.file_extensions}")

        if not self.charset:
            raise ValueError("Charset must not be empty")

    def is_void(self, name: str) -> bool:
        """Check whether a tag name is a void element (case-insensitive)"""
        return name.lower() in self.void_elements

    def accepts(self, path: Union[str, Path]) -> bool:
        """Check whether a file's extension is in the allow-list"""
        return Path(path).suffix.lower().lstrip('.') in self.file_extensions
