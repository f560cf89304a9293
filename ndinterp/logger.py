# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025, The ndinterp developers


"""
Thin wrapper around Python's ``logging`` module for the ``ndinterp``
logger hierarchy.

Usage
-----
>>> from ndinterp.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("grid built")
"""

import logging
import sys


__all__ = ["get_logger", "set_level", "setup"]


ROOT = "ndinterp"

logging.getLogger(ROOT).addHandler(logging.NullHandler())


def get_logger(name=None):
    """
    Return a logger under the ``ndinterp`` hierarchy.

    Module names such as ``ndinterp.grid`` inherit from the ``ndinterp``
    root logger, so a single ``set_level()`` call controls everything.
    """
    return logging.getLogger(name or ROOT)


def set_level(level=logging.INFO):
    """Set the log level for all ndinterp loggers at once."""
    logging.getLogger(ROOT).setLevel(level)


def setup(level=logging.INFO, stream=None):
    """
    Attach a stderr handler with the ndinterp format.

    Extra calls are no-ops.
    """
    root = logging.getLogger(ROOT)
    if any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-7s: %(message)s"))
    root.addHandler(handler)
    set_level(level)
