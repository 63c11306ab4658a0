from .comment_checker import CommentChecker
from .file_reader import MarkupFileReader
from .location_resolver import LocationResolver
from .markup_preprocessor import MarkupPreprocessor
from .message_sorter import sort_messages
from .nesting_validator import NestingValidator
from .tag_tokenizer import TagTokenizer
from .validator_config import ValidatorConfig, ValidatorDefaults


__all__ = [
    'CommentChecker', 'MarkupFileReader', 'LocationResolver', 'MarkupPreprocessor',
    'sort_messages', 'NestingValidator', 'TagTokenizer', 'ValidatorConfig', 'ValidatorDefaults',
]
