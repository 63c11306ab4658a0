from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union
from ..models import FileValidationResult, ValidateMessage
from ..utils.validator_config import ValidatorConfig

class BaseValidator(ABC):
    """Abstract base class for markup file validators"""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig.default()

    @abstractmethod
    def validate_content(self, file_path: str, html: str) -> List[ValidateMessage]:
        """Validate markup text that is already loaded"""
        pass

    @abstractmethod
    def check_file(self, file_path: Union[str, Path], charset: Optional[str] = None) -> FileValidationResult:
        """Validate a single file into a result record"""
        pass

    def validate_input(self, file_path: Union[str, Path]) -> bool:
        """Common input validation"""
        return Path(file_path).is_file() and self.config.accepts(file_path)
