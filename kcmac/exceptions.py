#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC exception classes.

This module defines the hierarchy of custom exception classes used throughout
the KCMAC library for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # KCMAC Exceptions
#######################################################################


class KCMACError(Exception):
    """KCMAC Base Exception.

    Base exception class for all KCMAC-related errors. All KCMAC specific
    exceptions inherit from this class, so callers may catch the whole family
    with a single handler.

    :cvar fmt: Default error message format template.
    """

    fmt = "KCMAC: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base KCMAC Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class KCMACValueError(KCMACError, ValueError):
    """KCMAC standard value error."""


class KCMACTypeError(KCMACError, TypeError):
    """KCMAC standard type error."""


class KCMACLengthError(KCMACError, ValueError):
    """KCMAC length validation error.

    Raised when input data or a key does not have one of the lengths required
    by the operation being performed.
    """


class KCMACAlignmentError(KCMACError, ValueError):
    """KCMAC data alignment error.

    Raised when data does not meet the block size alignment required by
    a block cipher operation.
    """


class KCMACVerificationError(KCMACError):
    """KCMAC verification error.

    Raised when a verification operation fails, such as comparison of
    a received authentication tag with the computed one.
    """


class KCMACUnsupportedOperation(KCMACError):
    """KCMAC unsupported operation.

    Raised when an operation is requested that is not allowed in the current
    state of an object.
    """
