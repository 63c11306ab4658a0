# errors.py


class FileReadError(Exception):
    """Raised when a markup file cannot be loaded"""

    def __init__(self, file_path: str, error_type: str, message: str):
        super().__init__(message)
        self.file_path = file_path
        self.error_type = error_type  # file_not_found, permission_error, encoding_error, ...
        self.message = message

    def __str__(self):
        return self.message
