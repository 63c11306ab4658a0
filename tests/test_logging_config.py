import logging

from tag_validator.utils.logging_config import PACKAGE_LOGGER, get_validation_logger, setup_logger


def close_handlers(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_validation_log_is_written_under_output_dir(tmp_path):
    logger = get_validation_logger(str(tmp_path), level=logging.DEBUG, console_output=False)
    try:
        assert logger.name == PACKAGE_LOGGER
        logging.getLogger('tag_validator.core.html_tag_validator').info("Validating: %s", 'page.html')
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / 'logs' / 'validation.log').read_text(encoding='utf-8')
        assert ' - tag_validator.core.html_tag_validator - INFO - Validating: page.html' in text
    finally:
        close_handlers(logger)


def test_reconfiguring_replaces_handlers():
    logger = setup_logger('tag_validator.test_reconfigure', console_output=True)
    try:
        setup_logger('tag_validator.test_reconfigure', console_output=True)
        assert len(logger.handlers) == 1
        setup_logger('tag_validator.test_reconfigure', console_output=False)
        assert logger.handlers == []
    finally:
        close_handlers(logger)
