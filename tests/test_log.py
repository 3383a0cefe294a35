"""Tests for srtstudio.log module."""

import logging

from srtstudio.log import get_logger, setup_logging


class TestLogging:
    def test_setup_logging(self, tmp_path):
        logger = setup_logging('debug', log_file=None)
        assert logger.name == 'srtstudio'
        assert logger.level == logging.DEBUG
        assert logger.handlers

    def test_get_logger(self):
        assert get_logger('search').name == 'srtstudio.search'
        assert get_logger('srtstudio.search').name == 'srtstudio.search'
