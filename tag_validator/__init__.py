"""
Tag Validator.

Static checker for HTML/JSP-like markup files that reports unclosed tags,
mismatched end tags, void elements given end tags and unterminated comments.
"""

from .core import HtmlTagValidator
from .models import (
    FileReadError,
    FileValidationResult,
    MessageLevel,
    MessageType,
    Position,
    Tag,
    ValidateMessage,
)
from .utils.validator_config import ValidatorConfig

__version__ = "1.0.0"

__all__ = [
    'HtmlTagValidator', 'ValidatorConfig',
    'FileReadError', 'FileValidationResult', 'MessageLevel', 'MessageType',
    'Position', 'Tag', 'ValidateMessage',
]
