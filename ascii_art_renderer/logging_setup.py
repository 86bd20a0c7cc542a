#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Logging
=====================================
Console logging shared by the CLI and library callers. Art goes to
stdout; log records go to stderr.
"""

import logging
import sys


_LOGGER_NAME = "ascii_art_renderer"


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(stream_handler)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
