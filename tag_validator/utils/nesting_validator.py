from typing import Iterable, List, Optional

from ..models import MessageLevel, MessageType, Tag, ValidateMessage, render_message
from .validator_config import ValidatorConfig


class NestingValidator:
    """Check tag nesting and closure with an open-tag stack"""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig.default()

    def validate(self, file_path: str, tokens: Iterable[Tag]) -> List[ValidateMessage]:
        """
        Validate the nesting of a token stream

        Only the first mismatch is reported, later ones are usually caused by
        it. An unclosed element is only reported for an otherwise clean file.

        Args:
            file_path: Path used as message prefix
            tokens: Tags in document order

        Returns:
            List of messages in the order they were found
        """
        messages: List[ValidateMessage] = []
        tag_stack: List[Tag] = []
        mismatch_reported = False

        for tag in tokens:
            if self.config.is_void(tag.name):
                if tag.is_self_closing:
                    messages.append(self._message(
                        file_path, MessageLevel.WARNING, MessageType.REDUNDANT_SELF_CLOSE,
                        "void element does not need a closing '/'", tag))
            elif tag.is_self_closing:
                continue
            elif tag.is_end_tag:
                mismatch_reported = self._handle_end_tag(
                    file_path, tag, tag_stack, messages, mismatch_reported)
            else:
                tag_stack.append(tag)

        if not messages and tag_stack:
            unclosed = tag_stack.pop()
            messages.append(self._message(
                file_path, MessageLevel.ERROR, MessageType.MISSING_END_TAG,
                "missing end tag", unclosed))

        return messages

    def _handle_end_tag(self, file_path: str, tag: Tag, tag_stack: List[Tag],
                        messages: List[ValidateMessage], mismatch_reported: bool) -> bool:
        """Handle end tag logic, returning the updated mismatch flag"""
        name = tag.name[1:]
        if self.config.is_void(name):
            messages.append(self._message(
                file_path, MessageLevel.ERROR, MessageType.VOID_END_TAG,
                "void element must not have an end tag", tag))
        elif not tag_stack:
            # Nothing to compare with; kept until the end of input
            tag_stack.append(tag)
        elif tag_stack[-1].name == name:
            tag_stack.pop()
        elif not mismatch_reported:
            messages.append(self._message(
                file_path, MessageLevel.ERROR, MessageType.TAG_MISMATCH,
                "tag mismatch", tag_stack[-1], tag))
            return True
        return mismatch_reported

    @staticmethod
    def _message(file_path: str, level: MessageLevel, message_type: MessageType,
                 description: str, tag: Tag, other: Optional[Tag] = None) -> ValidateMessage:
        return ValidateMessage(
            level=level,
            message_type=message_type,
            message=render_message(file_path, level, description, str(tag),
                                   str(other) if other is not None else None),
            primary_tag=tag,
            secondary_tag=other,
        )
