# validate_message.py

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from .tag import Tag


class MessageLevel(Enum):
    """Severity of a validation message"""
    HINT = "hint"        # reserved, no rule emits it yet
    WARNING = "warning"
    ERROR = "error"

    @property
    def prefix(self) -> str:
        return f"[{self.name}]"


class MessageType(Enum):
    """Rule that produced a validation message"""
    # Nesting rules
    TAG_MISMATCH = "tag_mismatch"
    VOID_END_TAG = "void_end_tag"
    REDUNDANT_SELF_CLOSE = "redundant_self_close"
    MISSING_END_TAG = "missing_end_tag"

    # Comment delimiter rules
    UNTERMINATED_COMMENT = "unterminated_comment"
    UNOPENED_COMMENT = "unopened_comment"


@dataclass(frozen=True)
class ValidateMessage:
    """Individual diagnostic produced while validating one file"""
    level: MessageLevel
    message_type: MessageType
    message: str
    primary_tag: Tag
    secondary_tag: Optional[Tag] = None

    @property
    def line(self) -> int:
        return self.primary_tag.position.line

    def __str__(self):
        return self.message


def render_message(file_path: str, level: MessageLevel, description: str,
                   subject: str, other: Optional[str] = None) -> str:
    """
    Render a diagnostic line.

    Args:
        file_path: Path of the validated file, used as prefix only
        level: Message level
        description: Human readable description of the defect
        subject: Representation of the primary tag
        other: Representation of the conflicting tag, if any

    Returns:
        '<file_path> <[LEVEL]> <description>: <subject>[ and <other>]'
    """
    text = f"{file_path} {level.prefix} {description}: {subject}"
    if other is not None:
        text += f" and {other}"
    return text
