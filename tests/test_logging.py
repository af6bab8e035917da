"""
Tests for the logging helpers.
"""

import logging

import numpy as np
import pytest

from gaussmix import Component, evaluate_density, prepare_covariance
from gaussmix.utils import setup_logging, verbosity_to_level


@pytest.fixture
def package_logger():
    logger = logging.getLogger("gaussmix")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for h in logger.handlers:
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level)


class TestVerbosityToLevel:
    @pytest.mark.parametrize("verbose, level", [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ])
    def test_mapping(self, verbose, level):
        assert verbosity_to_level(verbose) == level


class TestSetupLogging:
    def test_returns_package_logger(self, package_logger):
        logger = setup_logging(logging.WARNING)
        assert logger is package_logger
        assert logger.level == logging.WARNING

    def test_repeated_calls_do_not_duplicate(self, package_logger):
        before = len(package_logger.handlers)
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        assert len(package_logger.handlers) == before + 1

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        handlers = list(root.handlers)
        setup_logging(logging.DEBUG)
        assert root.handlers == handlers

    def test_density_records_reach_file(self, package_logger, tmp_path):
        log_file = tmp_path / "gaussmix.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))

        comp = prepare_covariance(Component(1.0, [0.0], [[1.0]]), 1)
        evaluate_density(comp, 1, np.zeros((3, 1)))
        for h in package_logger.handlers:
            h.flush()

        text = log_file.read_text()
        assert "[DEBUG] gaussmix.density: Prepared covariance" in text
        assert "Evaluating density: d=1, n=3" in text
