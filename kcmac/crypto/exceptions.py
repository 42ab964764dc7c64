#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC cryptographic exceptions module.

This module defines the exceptions raised by the CMAC engine: invalid key
length at construction, misuse of the streaming protocol after the tag was
produced, and failed tag verification.
"""

from kcmac.exceptions import (
    KCMACError,
    KCMACLengthError,
    KCMACUnsupportedOperation,
    KCMACVerificationError,
)


class KCMACCryptoError(KCMACError):
    """General KCMAC Crypto Error.

    Base exception class for all cryptographic operations within KCMAC.
    """


class CMACInvalidKeyLengthError(KCMACCryptoError, KCMACLengthError):
    """CMAC key does not have 128, 192 or 256 bits."""


class CMACAlreadyFinalizedError(KCMACCryptoError, KCMACUnsupportedOperation):
    """CMAC is already finalized.

    Raised when more data is fed to the computation, either by ``update`` or by
    ``digest`` with data, after the MAC tag has been produced.
    """


class CMACTagMismatchError(KCMACCryptoError, KCMACVerificationError):
    """MAC tag verification failed.

    Verification failure is signaled by this exception rather than a false
    return value, so that it can't be silently ignored by the caller.
    """
