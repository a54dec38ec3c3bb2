import logging

from uninits.core.logger import configure_logging, get_logger


def test_configure_logging_attaches_one_handler():
    root = configure_logging("debug")
    configure_logging("info")

    assert len(root.handlers) == 1
    assert root.level == logging.INFO
    assert root.propagate is False
    assert logging.getLogger("pymongo").level == logging.WARNING


def test_get_logger_children():
    assert get_logger("uploads").name == "uninits.uploads"
    assert get_logger().name == "uninits"
