import logging

from pressure_release import logging as package_logging
from pressure_release.release import max_pressure


def test_get_logger_inherits_root():
    logger = package_logging.get_logger("pressure_release.something")
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.getLogger("pressure_release").level


def test_debug_logging(sample, caplog):
    try:
        package_logging.enable_debug_logging()
        assert logging.getLogger("pressure_release").level == logging.DEBUG
        max_pressure(sample)
        assert "Search cached" in caplog.text
    finally:
        package_logging.set_log_level(logging.INFO)
    assert logging.getLogger("pressure_release").level == logging.INFO


def test_reset_installs_one_fresh_handler():
    root = logging.getLogger("pressure_release")
    try:
        package_logging.reset_logging()
        assert root.handlers == []
        package_logging.get_logger("pressure_release.graph")
        package_logging.get_logger("pressure_release.solver")
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
    finally:
        package_logging.reset_logging()
        package_logging.get_logger(__name__)
