#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC - AES based Cipher-based Message Authentication Code.

Streaming AES-CMAC (NIST SP 800-38B, RFC 4493) with the AES-CMAC-96 (RFC 4494)
and AES-CMAC-PRF-128 (RFC 4615) derived constructions.

The package behavior is configured through environment variables which are
resolved once, when the package is imported.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_kcmac_version() -> Version:
    """Get KCMAC version information.

    :return: Parsed version object containing KCMAC version information.
    """
    from .__version__ import __version__ as kcmac_version

    return parse(kcmac_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_kcmac_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

KCMAC_VERSION_BASE = version.base_version
KCMAC_PLATFORM_DIRS = PlatformDirs(appauthor="nxp", appname="kcmac", version=KCMAC_VERSION_BASE)

KCMAC_DEBUG = value_to_bool(os.environ.get("KCMAC_DEBUG"))

KCMAC_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("KCMAC_DEBUG_LOGGING_DISABLED"))
KCMAC_DEBUG_LOG_FILE = os.environ.get(
    "KCMAC_DEBUG_LOG_FILE", os.path.join(KCMAC_PLATFORM_DIRS.user_log_dir, "debug.log")
)
