#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC logging utilities with colored console output support."""

import logging
import logging.config
import logging.handlers
import os
import platform
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from kcmac import KCMAC_DEBUG_LOG_FILE, KCMAC_DEBUG_LOGGING_DISABLED, __version__
from kcmac.exceptions import KCMACError
from kcmac.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

LOGGING_CONFIG_SEARCH_PATHS = [os.path.expanduser("~/.kcmac")]


def load_logging_config(search_paths: Optional[list[str]] = None) -> Optional[str]:
    """Apply logging configuration from a `logging.yaml` file, if there is any.

    :param search_paths: Directories searched before the current working directory.
    :return: Path to the applied configuration file, None if not found.
    """
    config_file = find_file(
        "logging.yaml",
        search_paths=search_paths or LOGGING_CONFIG_SEARCH_PATHS,
        raise_exc=False,
    )
    if not config_file:
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (KCMACError, ValueError, TypeError) as exc:
        logging.getLogger("kcmac").warning(f"Invalid logging config {config_file}: {exc}")
        return None
    return config_file


class ColoredFormatter(logging.Formatter):
    """KCMAC Colored Logging Formatter.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()
        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with the format string of its level.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        return logging.Formatter(self.formats.get(record.levelno)).format(record)


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install KCMAC log handlers.

    :param level: logging level of the console, defaults to logging.WARNING
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, detected from the stream if not specified
    :param create_debug_logger: create rotating debug file logger
    """
    level = level or logging.WARNING
    target_logger = logging.getLogger("kcmac")
    target_logger.setLevel(logging.DEBUG)
    config_file = load_logging_config()
    if config_file:
        target_logger.debug(f"Logging config loaded from {config_file}")

    color = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)

    if not create_debug_logger or KCMAC_DEBUG_LOGGING_DISABLED:
        return
    for existing in target_logger.handlers:
        if (
            isinstance(existing, logging.handlers.RotatingFileHandler)
            and existing.baseFilename == os.path.abspath(KCMAC_DEBUG_LOG_FILE)
        ):
            return
    try:
        os.makedirs(os.path.dirname(KCMAC_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            KCMAC_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        target_logger.warning(f"Failed to initialize debug logging: {str(exc)}")
        return
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)

    target_logger.debug(f"* KCMAC DEBUG LOGGING STARTED {datetime.now():%Y-%m-%d %H:%M:%S} *")
    target_logger.debug(f"* KCMAC version: {__version__}")
    target_logger.debug(f"* Python version: {sys.version.split()[0]}")
    target_logger.debug(f"* OS version: {platform.platform()}")
    target_logger.debug(f"* Last command: {sys.argv}")
