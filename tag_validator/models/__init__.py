from .errors import FileReadError
from .tag import Position, Tag, derive_name
from .validate_message import MessageLevel, MessageType, ValidateMessage, render_message
from .validation_result import FileValidationResult


__all__ = [
    'FileReadError',
    'Position', 'Tag', 'derive_name',
    'MessageLevel', 'MessageType', 'ValidateMessage', 'render_message',
    'FileValidationResult',
]
