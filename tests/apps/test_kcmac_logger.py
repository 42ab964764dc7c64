#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the KCMAC logging setup."""

import io
import logging
import os
from typing import Iterator
from unittest.mock import patch

import pytest

from kcmac.apps.utils import kcmac_logger
from kcmac.crypto.cmac import Cmac
from kcmac.utils.misc import write_file


@pytest.fixture
def kcmac_logger_handlers() -> Iterator[logging.Logger]:
    target = logging.getLogger("kcmac")
    handlers = list(target.handlers)
    yield target
    for handler in target.handlers[len(handlers) :]:
        target.removeHandler(handler)


def test_install_console(kcmac_logger_handlers: logging.Logger) -> None:
    stream = io.StringIO()
    kcmac_logger.install(level=logging.DEBUG, stream=stream, create_debug_logger=False)
    Cmac(bytes(16)).digest(b"data")
    output = stream.getvalue()
    assert "Cmac initialized with AES-128" in output
    assert "\x1b[" not in output


def test_install_warning_level(kcmac_logger_handlers: logging.Logger) -> None:
    stream = io.StringIO()
    kcmac_logger.install(stream=stream, create_debug_logger=False)
    Cmac(bytes(16)).digest(b"data")
    assert stream.getvalue() == ""


def test_colored_formatter() -> None:
    record = logging.LogRecord("kcmac", logging.ERROR, __file__, 1, "failure", None, None)
    assert "\x1b[" in kcmac_logger.ColoredFormatter(colored=True).format(record)
    assert "\x1b[" not in kcmac_logger.ColoredFormatter(colored=False).format(record)


def test_load_logging_config(tmpdir: str) -> None:
    config_file = os.path.join(tmpdir, "logging.yaml")
    write_file("version: 1\nloggers:\n  kcmac:\n    level: ERROR\n", config_file)
    with patch("logging.config.dictConfig") as dict_config:
        assert kcmac_logger.load_logging_config([str(tmpdir)]) == config_file.replace("\\", "/")
    dict_config.assert_called_once_with({"version": 1, "loggers": {"kcmac": {"level": "ERROR"}}})


def test_load_logging_config_missing(tmpdir: str) -> None:
    assert kcmac_logger.load_logging_config([str(tmpdir)]) is None
