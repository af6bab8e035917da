"""Logging setup for gaussmix.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves. Scripts call :func:`setup_logging` to see the
``gaussmix.*`` records (covariance preparation, batch sizes, degenerate
factor dumps).
"""

import logging
from typing import Optional

PACKAGE_LOGGER = "gaussmix"

_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def verbosity_to_level(verbose: int) -> int:
    """Map a ``--verbose`` count to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the ``gaussmix`` logger.

    Handlers installed by an earlier call are replaced, so calling this twice
    does not duplicate output. Records still propagate to the root logger.

    Parameters
    ----------
    level : int
        Logging level for the package logger.
    log_file : str, optional
        Path to a file receiving the same records.

    Returns
    -------
    logger : logging.Logger
        The ``gaussmix`` package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, '_gaussmix', False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._gaussmix = True
        logger.addHandler(handler)

    return logger
