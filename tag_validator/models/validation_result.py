# validation_result.py

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
from .validate_message import MessageLevel, MessageType, ValidateMessage

@dataclass
class FileValidationResult:
    """Results from validating the tags of a single markup file"""
    file_path: str
    passed: bool
    messages: List[ValidateMessage] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def readable(self) -> bool:
        """False when the file could not be loaded at all"""
        return self.error is None

    def get_messages_by_level(self, level: MessageLevel) -> List[ValidateMessage]:
        """Get all messages of a specific level"""
        return [message for message in self.messages if message.level == level]

    def get_messages_by_type(self, message_type: MessageType) -> List[ValidateMessage]:
        """Get all messages produced by a specific rule"""
        return [message for message in self.messages if message.message_type == message_type]

    def count_by_level(self) -> Dict[str, int]:
        """Count messages per level, including levels with no messages"""
        return {level.value: len(self.get_messages_by_level(level)) for level in MessageLevel}
