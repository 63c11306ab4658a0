"""
Tag Validation Entry Point.

This script provides the command-line interface for checking the tags of
HTML/JSP-like markup files.
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

# Add the parent directory to Python path so we can import tag_validator
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config import RunConfig, get_path_config
from tag_validator import HtmlTagValidator, MessageLevel, __version__
from tag_validator.models import FileValidationResult
from tag_validator.reporting import ValidationReporter
from tag_validator.utils.logging_config import PACKAGE_LOGGER, get_validation_logger, setup_logger


def run_validation(run_config: RunConfig) -> Optional[List[FileValidationResult]]:
    """
    Run tag validation.

    Args:
        run_config: Settings of this run

    Returns:
        List of results, or None if the run could not be completed
    """
    logger = logging.getLogger(__name__)
    quiet = run_config.quiet

    try:
        run_config.validate()
        validator = HtmlTagValidator(run_config.validator_config(), quiet=quiet)
    except ValueError as e:
        logger.error("Invalid configuration: %s", str(e))
        print(f"[ERROR] {str(e)}")
        return None

    reporter = ValidationReporter()

    logger.info("Starting validation for: %s", run_config.target)
    if not quiet:
        print("\n=== TAG VALIDATION ===\n")
        print(f"Validating files in: {run_config.target}")
        print(f"Extensions: {', '.join(validator.config.file_extensions)} | Charset: {run_config.charset}")
        print("-" * 60)

    try:
        results = validator.validate_directory(run_config.target, run_config.charset)

        reporter.print_messages(results)
        if not quiet:
            reporter.print_batch_summary(results)

        if run_config.output_dir:
            written = reporter.save_detailed_report(results, run_config.output_dir, run_config.report_formats)
            logger.info("Reports saved to: %s", run_config.output_dir)
            if not quiet:
                for path in written:
                    print(f"[OUTPUT] {path}")

        return results

    except (IOError, OSError, RuntimeError, ValueError) as e:
        logger.error("Error during validation: %s", str(e), exc_info=True)
        print(f"[ERROR] Error during validation: {str(e)}")
        traceback.print_exc()
        return None


def has_failures(results: List[FileValidationResult], fail_on: str = "error") -> bool:
    """
    Decide whether a run should exit with a failure status.

    Args:
        results: List of FileValidationResult objects
        fail_on: 'error' or 'warning'

    Returns:
        True if any file is unreadable or has messages at the fail_on level
    """
    levels = {MessageLevel.ERROR}
    if fail_on == "warning":
        levels.add(MessageLevel.WARNING)

    return any(
        not result.readable or any(m.level in levels for m in result.messages)
        for result in results
    )


def parse_arguments(argv: Optional[List[str]] = None):
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Check tag closure and nesting of HTML/JSP files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a directory with the default extensions (htm, html, jsp)
  python validate_tags.py webapp/

  # Validate a GBK encoded JSP tree and write Excel and JSON reports
  python validate_tags.py webapp/ --charset gbk --output-dir results/webapp

  # Only .vm templates, fail on warnings too
  python validate_tags.py templates/ --ext vm --fail-on warning
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'path',
        type=str,
        help='File or directory to validate'
    )

    parser.add_argument(
        '--charset',
        type=str,
        default='utf-8',
        help='Charset of the files (default: utf-8)'
    )

    parser.add_argument(
        '--ext',
        action='append',
        dest='extensions',
        help='File extension to validate, repeatable (default: htm, html, jsp)'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        help='Output directory for validation reports'
    )

    parser.add_argument(
        '--format',
        action='append',
        dest='formats',
        choices=['json', 'excel', 'csv'],
        help='Report format, repeatable (default: json and excel)'
    )

    parser.add_argument(
        '--fail-on',
        choices=['error', 'warning'],
        default='error',
        help='Lowest message level that makes the run fail (default: error)'
    )

    # Verbosity control
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output (DEBUG level logging)'
    )
    verbosity_group.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Suppress console output except messages and errors'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Set logging level (default: WARNING). Overridden by --verbose or --quiet'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main function to handle command-line arguments."""
    args = parse_arguments(argv)

    # Determine log level
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = getattr(logging, args.log_level)

    # Reports go to --output-dir, or to results/ when only --format is given
    output_dir = args.output_dir
    if output_dir is None and args.formats:
        output_dir = str(get_path_config().ensure_results_dir())

    if output_dir:
        get_validation_logger(output_dir, level=log_level, console_output=not args.quiet)
    else:
        setup_logger(PACKAGE_LOGGER, level=log_level, console_output=not args.quiet)

    logger = logging.getLogger(__name__)
    logger.info("Starting tag validation (version %s)", __version__)

    run_config = RunConfig(
        target=args.path,
        charset=args.charset,
        extensions=args.extensions or RunConfig.default().extensions,
        output_dir=output_dir,
        report_formats=tuple(args.formats) if args.formats else RunConfig.default().report_formats,
        fail_on=args.fail_on,
        quiet=args.quiet
    )

    results = run_validation(run_config)
    if results is None:
        logger.error("Validation failed")
        print("[ERROR] Validation failed. Please check the error messages above.")
        sys.exit(2)

    if has_failures(results, run_config.fail_on):
        sys.exit(1)

    logger.info("Validation completed successfully")
    if not args.quiet:
        print("\nValidation complete.")
    sys.exit(0)


if __name__ == "__main__":
    main()
