#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Common click options for KCMAC applications."""

import logging
from typing import Callable, TypeVar

import click

from kcmac import __version__ as kcmac_version

FC = TypeVar("FC", bound=Callable)

ALGORITHMS = ["cmac", "cmac96", "prf128"]


def kcmac_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(kcmac_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def kcmac_key_option(options: FC) -> FC:
    """Key click option decorator.

    Provides: `key: str` hex string or path to a text file with it.

    :return: Click decorator
    """
    return click.option(
        "-k",
        "--key",
        required=True,
        type=str,
        metavar="KEY|FILE",
        help="Key as a hex-string either directly on command line or in a text file.",
    )(options)


def kcmac_data_options(options: FC) -> FC:
    """Input data click options decorator.

    Provides: `input_file: str` path to binary data, `data: str` hex string data.

    :return: Click decorator
    """
    options = click.option("-d", "--data", type=str, help="Input data as a hex-string.")(options)
    options = click.option(
        "-i",
        "--input-file",
        type=click.Path(exists=True, dir_okay=False),
        help="Path to binary file with input data.",
    )(options)
    return options


def kcmac_algorithm_option(options: FC) -> FC:
    """Algorithm click option decorator.

    Provides: `algorithm: str` one of cmac, cmac96, prf128.

    :return: Click decorator
    """
    return click.option(
        "-a",
        "--algorithm",
        type=click.Choice(ALGORITHMS, case_sensitive=False),
        default="cmac",
        show_default=True,
        help="AES-CMAC (RFC 4493), AES-CMAC-96 (RFC 4494) or AES-CMAC-PRF-128 (RFC 4615).",
    )(options)
