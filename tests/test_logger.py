import logging

from erdify.utils.logger import setup_logger


def test_loggers_are_namespaced_under_package():
    logger = setup_logger("some_module")

    assert logger.name == "erdify.some_module"
    assert setup_logger("erdify.some_module") is logger


def test_handlers_are_not_duplicated():
    logger = setup_logger("handler_check", level=logging.DEBUG)
    again = setup_logger("handler_check")

    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
