"""
Tag Validator - Centralized Configuration
==========================================

This module provides centralized path management and run configuration for
the tag validator command-line tool. All paths are defined here to ensure
consistency across the codebase.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple
from pathlib import Path

from tag_validator.utils.validator_config import ValidatorConfig, ValidatorDefaults


class PathConfig:
    """Centralized path configuration for the tag validator"""

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize path configuration.

        Args:
            project_root: Root directory of the project. If None, uses current directory.
        """
        self.project_root = project_root or Path.cwd()

        # Report output directory
        self.results_dir = self.project_root / "results"

    def ensure_results_dir(self, name: Optional[str] = None) -> Path:
        """
        Create and return the results directory, optionally a named subfolder.

        Args:
            name: Optional subfolder name

        Returns:
            Path to the directory
        """
        target = self.results_dir / name if name else self.results_dir
        target.mkdir(parents=True, exist_ok=True)
        return target


@dataclass
class RunConfig:
    """Configuration for one validation run"""

    # Target file or directory
    target: str = "."

    # Loading settings
    charset: str = ValidatorDefaults.CHARSET
    extensions: List[str] = field(default_factory=lambda: list(ValidatorDefaults.FILE_EXTENSIONS))

    # Output settings
    output_dir: Optional[str] = None
    report_formats: Tuple[str, ...] = ("json", "excel")
    fail_on: str = "error"  # Options: "error", "warning"
    quiet: bool = False

    @classmethod
    def default(cls):
        """Create default configuration"""
        return cls()

    def validate(self):
        """Validate configuration settings"""
        if not Path(self.target).exists():
            raise ValueError(f"Path not found: {self.target}")

        valid_levels = ["error", "warning"]
        if self.fail_on not in valid_levels:
            raise ValueError(f"fail_on must be one of {valid_levels}, got: {self.fail_on}")

        valid_formats = ["json", "excel", "csv"]
        invalid = [f for f in self.report_formats if f not in valid_formats]
        if invalid:
            raise ValueError(f"report formats must be among {valid_formats}, got: {invalid}")

    def validator_config(self) -> ValidatorConfig:
        """Build the immutable validator configuration for this run"""
        return ValidatorConfig.with_extensions(self.extensions, self.charset)


# Global path configuration instance
_global_path_config = None


def get_path_config(project_root: Optional[Path] = None) -> PathConfig:
    """
    Get the global path configuration instance.

    Args:
        project_root: Project root directory. Only used on the first call
                      or when explicitly given.

    Returns:
        PathConfig instance
    """
    global _global_path_config

    if _global_path_config is None or project_root is not None:
        _global_path_config = PathConfig(project_root)

    return _global_path_config
