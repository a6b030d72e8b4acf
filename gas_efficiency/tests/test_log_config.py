from __future__ import annotations

import logging

from gas_efficiency.utils.log_config import configure_logging


def test_configure_logging_sets_level_once():
    logger = logging.getLogger("gas_efficiency")
    before = list(logger.handlers)
    try:
        configure_logging("debug")
        configure_logging("warning")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == max(len(before), 1)
    finally:
        logger.handlers = before
        logger.setLevel(logging.NOTSET)
