import logging

from jira_dashboard.utils.logging import (
    log_config_param,
    mask_sensitive,
    setup_logging,
)


def test_setup_logging_default_level():
    """Test setup_logging with default WARNING level"""
    logger = setup_logging()

    # Check logger level is set to WARNING
    assert logger.level == logging.WARNING

    # Check root logger is configured
    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING

    # Verify handler and formatter
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert handler.formatter._fmt == "%(levelname)s - %(name)s - %(message)s"


def test_setup_logging_sets_uvicorn_levels():
    setup_logging(logging.DEBUG)
    assert logging.getLogger("uvicorn").level == logging.DEBUG
    assert logging.getLogger("uvicorn.error").level == logging.DEBUG


def test_setup_logging_removes_existing_handlers():
    """Test that setup_logging removes existing handlers"""
    root_logger = logging.getLogger()
    test_handler = logging.StreamHandler()
    root_logger.addHandler(test_handler)

    setup_logging()

    assert len(root_logger.handlers) == 1
    assert test_handler not in root_logger.handlers


def test_setup_logging_logger_name():
    logger = setup_logging()
    assert logger.name == "jira-dashboard"


def test_mask_sensitive():
    assert mask_sensitive(None) == "Not Provided"
    assert mask_sensitive("short") == "*****"
    assert mask_sensitive("abcd1234567890wxyz") == "abcd**********wxyz"


def test_log_config_param_masks_secrets(caplog):
    logger = logging.getLogger("jira-dashboard.test")
    with caplog.at_level(logging.INFO, logger="jira-dashboard.test"):
        log_config_param(logger, "Jira", "token", "abcd1234567890wxyz", sensitive=True)
        log_config_param(logger, "Jira", "URL", None)
    assert "Jira token: abcd**********wxyz" in caplog.text
    assert "Jira URL: Not Provided" in caplog.text
