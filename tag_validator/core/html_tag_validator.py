"""
HTML Tag Validation.

This module checks that the tags of HTML/JSP-like markup files are properly
closed and nested.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models import FileReadError, FileValidationResult, MessageLevel, ValidateMessage
from ..utils.comment_checker import CommentChecker
from ..utils.file_reader import MarkupFileReader
from ..utils.markup_preprocessor import MarkupPreprocessor
from ..utils.message_sorter import sort_messages
from ..utils.nesting_validator import NestingValidator
from ..utils.tag_tokenizer import TagTokenizer
from ..utils.validator_config import ValidatorConfig
from .base_validator import BaseValidator

class HtmlTagValidator(BaseValidator):
    """
    HTML tag validator.

    Checks that tags are closed and that end tags appear where they belong:

    - Masks comments, template blocks and script bodies
    - Extracts the remaining tags with their line and column
    - Matches start and end tags with a stack
    - Reports void elements written with an end tag or a redundant '/'
    - Reports comment delimiters without a counterpart

    Attributes:
        config: Immutable ValidatorConfig (void elements, extensions, charset)
        preprocessor: MarkupPreprocessor instance
        tokenizer: TagTokenizer instance
        nesting_validator: NestingValidator instance
        comment_checker: CommentChecker instance
        logger: Logger instance for this validator
    """

    def __init__(self, config: Optional[ValidatorConfig] = None, quiet: bool = False):
        """
        Initialize the validator.

        Args:
            config: Validator configuration. If None, uses default
            quiet: If True, suppress console output
        """
        super().__init__(config)
        self.config.validate()
        self.preprocessor = MarkupPreprocessor()
        self.tokenizer = TagTokenizer()
        self.nesting_validator = NestingValidator(self.config)
        self.comment_checker = CommentChecker()
        self.logger = logging.getLogger(__name__)
        self.quiet = quiet

    def validate_content(self, file_path: str, html: str) -> List[ValidateMessage]:
        """
        Run the validation pipeline on loaded text.

        Args:
            file_path: Path used as message prefix
            html: Raw markup text

        Returns:
            Messages sorted by line
        """
        masked_html = self.preprocessor.mask(html)
        tokens = self.tokenizer.tokenize(masked_html)

        messages = self.nesting_validator.validate(file_path, tokens)
        messages.extend(self.comment_checker.check_comments(file_path, masked_html))
        return sort_messages(messages)

    def validate_file(self, file_path: Union[str, Path], charset: Optional[str] = None) -> List[ValidateMessage]:
        """
        Validate a single markup file.

        Args:
            file_path: Path to the file
            charset: Charset of the file. If None, uses the configured charset

        Returns:
            Messages sorted by line

        Raises:
            FileReadError: If the file cannot be read or decoded
        """
        file_path = str(Path(file_path).absolute())
        html = MarkupFileReader.read_file(file_path, charset or self.config.charset)
        return self.validate_content(file_path, html)

    def check_file(self, file_path: Union[str, Path], charset: Optional[str] = None) -> FileValidationResult:
        """
        Validate a single file into a result record.

        Args:
            file_path: Path to the file
            charset: Charset of the file. If None, uses the configured charset

        Returns:
            FileValidationResult with messages and metrics

        Raises:
            FileReadError: If the file cannot be read or decoded
        """
        file_path = Path(file_path)
        messages = self.validate_file(file_path, charset)

        return FileValidationResult(
            file_path=str(file_path.absolute()),
            passed=not any(m.level == MessageLevel.ERROR for m in messages),
            messages=messages,
            metrics=self._build_metrics(file_path, messages)
        )

    def validate_directory(self, path: Union[str, Path], charset: Optional[str] = None) -> List[FileValidationResult]:
        """
        Validate every accepted file below a path.

        A file that cannot be read gets an error result; the walk continues
        with its siblings.

        Args:
            path: File or directory to validate
            charset: Charset of the files. If None, uses the configured charset

        Returns:
            List of FileValidationResult objects in traversal order
        """
        files = self._find_markup_files(path)
        if not files:
            return []

        results = []
        self.logger.info("Found %d markup files to validate", len(files))
        if not self.quiet:
            print(f"Found {len(files)} markup files to validate")
            print("=" * 60)

        for markup_file in files:
            self.logger.debug("Validating: %s", markup_file)
            try:
                result = self.check_file(markup_file, charset)
            except FileReadError as e:
                self.logger.error("Error reading %s: %s", markup_file, str(e), exc_info=True)
                if not self.quiet:
                    print(f"   [ERROR] {markup_file.name}: {str(e)}")
                results.append(self._create_error_result(markup_file, e))
                continue

            status = "[VALID]" if result.passed else "[INVALID]"
            self.logger.info("%s: %s | Messages: %d", markup_file.name, status, len(result.messages))
            if not self.quiet:
                print(f"   {status} {markup_file.name} | Messages: {len(result.messages)}")
            results.append(result)

        return results

    def validate_path(self, path: Union[str, Path], charset: Optional[str] = None) -> List[ValidateMessage]:
        """
        Validate a file or directory and concatenate the messages.

        Args:
            path: File or directory to validate
            charset: Charset of the files. If None, uses the configured charset

        Returns:
            Messages of all files, each file's messages sorted by line
        """
        messages = []
        for result in self.validate_directory(path, charset):
            messages.extend(result.messages)
        return messages

    def _find_markup_files(self, path: Union[str, Path]) -> List[Path]:
        """
        Find the files accepted by the extension allow-list.

        Args:
            path: Path to a directory or file

        Returns:
            Sorted list of Path objects
        """
        path = Path(path)

        if not path.exists():
            self.logger.error("Path not found: %s", path)
            if not self.quiet:
                print(f"[ERROR] Path not found: {path}")
            return []

        if MarkupFileReader.validate_file_path(path):
            return [path] if self.config.accepts(path) else []

        markup_files = sorted(p for p in path.rglob('*') if self.validate_input(p))

        if not markup_files:
            self.logger.warning("No markup files found in %s with extensions %s",
                                path, ', '.join(self.config.file_extensions))

        return markup_files

    def _build_metrics(self, file_path: Path, messages: List[ValidateMessage]) -> Dict[str, Any]:
        """Build the per-file metrics dictionary"""
        breakdown: Dict[str, int] = {}
        for message in messages:
            key = message.message_type.value
            breakdown[key] = breakdown.get(key, 0) + 1

        return {
            "file_name": file_path.name,
            "file_readable": True,
            "total_messages": len(messages),
            "errors": len([m for m in messages if m.level == MessageLevel.ERROR]),
            "warnings": len([m for m in messages if m.level == MessageLevel.WARNING]),
            "hints": len([m for m in messages if m.level == MessageLevel.HINT]),
            "message_breakdown": breakdown,
        }

    def _create_error_result(self, markup_file: Path, error: FileReadError) -> FileValidationResult:
        """
        Create an error result for a file that could not be read.

        Args:
            markup_file: Path to the markup file
            error: The read failure

        Returns:
            FileValidationResult with error information
        """
        return FileValidationResult(
            file_path=str(markup_file.absolute()),
            passed=False,
            messages=[],
            metrics={
                "file_name": markup_file.name,
                "file_readable": False,
                "error_type": error.error_type,
            },
            error=str(error)
        )
