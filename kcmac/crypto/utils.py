#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC cryptographic helper functions."""

from typing import Union

from cryptography.hazmat.primitives import constant_time

from kcmac.exceptions import KCMACTypeError

BytesLike = Union[bytes, bytearray, memoryview]


def to_bytes(data: Union[BytesLike, str]) -> bytes:
    """Convert supported input data into bytes.

    Strings are encoded as UTF-8.

    :param data: Input data.
    :raises KCMACTypeError: Unsupported data type.
    :return: Data as bytes.
    """
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise KCMACTypeError(f"Unsupported data type: {type(data).__name__}")


def secure_compare(first: BytesLike, second: BytesLike) -> bool:
    """Compare two byte strings in constant time.

    Operands of different length are unequal right away; the length is not
    considered secret. Equal-length operands are compared with every byte
    inspected regardless of where they differ.

    :param first: First operand.
    :param second: Second operand.
    :return: True if the operands are equal, False otherwise.
    """
    first, second = to_bytes(first), to_bytes(second)
    if len(first) != len(second):
        return False
    return constant_time.bytes_eq(first, second)
