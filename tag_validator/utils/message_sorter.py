from typing import Iterable, List

from ..models import ValidateMessage


def sort_messages(messages: Iterable[ValidateMessage]) -> List[ValidateMessage]:
    """Order messages by the line of their primary tag, keeping ties stable"""
    return sorted(messages, key=lambda message: message.primary_tag.position.line)
