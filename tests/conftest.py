#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC pytest configuration and shared test fixtures."""

import os

import pytest

os.environ["KCMAC_DEBUG_LOGGING_DISABLED"] = "True"

from tests.cli_runner import CliRunner  # noqa: E402  # pylint: disable=wrong-import-position


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def tests_root_dir() -> str:
    """Get the root directory of tests.

    :return: Absolute path to the tests root directory.
    """
    return os.path.dirname(os.path.abspath(__file__))
