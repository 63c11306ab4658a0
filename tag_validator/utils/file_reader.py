"""
Markup File Reader Utility.

This module provides charset-aware markup file reading with error handling
that turns I/O and decoding failures into FileReadError.
"""

import codecs
from pathlib import Path
from typing import Union

from ..models import FileReadError


class MarkupFileReader:
    """
    Handle markup file I/O operations.

    This class reads files as text in a caller-chosen charset and reports the
    various file access issues (not found, permissions, encoding, unknown
    charset) as FileReadError.
    """

    @staticmethod
    def read_file(file_path: Union[str, Path], charset: str = 'utf-8') -> str:
        """
        Read a markup file.

        Args:
            file_path: Path to the markup file
            charset: Name of the charset used to decode the file

        Returns:
            File content as text

        Raises:
            FileReadError: If the file cannot be read or decoded
        """
        file_path = str(file_path)

        try:
            codecs.lookup(charset)
        except LookupError:
            raise FileReadError(file_path, 'unknown_charset', f"Unknown charset: {charset}")

        if Path(file_path).is_dir():
            raise FileReadError(file_path, 'not_a_file', f"Not a file: {file_path}")

        try:
            # newline='' keeps CR characters so offsets match the file
            with open(file_path, 'r', encoding=charset, newline='') as f:
                return f.read()

        except FileNotFoundError:
            raise FileReadError(file_path, 'file_not_found', f"File not found: {file_path}")

        except PermissionError:
            raise FileReadError(file_path, 'permission_error', f"Permission denied: {file_path}")

        except UnicodeDecodeError as e:
            raise FileReadError(file_path, 'encoding_error', f"Encoding error ({charset}): {str(e)}")

        except OSError as e:
            raise FileReadError(file_path, 'io_error', f"Unexpected error reading file: {str(e)}")

    @staticmethod
    def validate_file_path(file_path: Union[str, Path]) -> bool:
        """
        Validate if the file path exists and is a regular file.

        Args:
            file_path: Path to validate

        Returns:
            True if file exists and is a file; False otherwise
        """
        path = Path(file_path)
        return path.exists() and path.is_file()
