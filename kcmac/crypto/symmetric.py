#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC symmetric cryptography utilities.

AES block cipher adapter used by the CMAC engine. Only encryption without
padding is provided: ECB for single blocks and CBC, either one-shot or as
a streaming chain that keeps its state between calls.
"""

from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from kcmac.exceptions import KCMACAlignmentError, KCMACValueError

AES_BLOCK_SIZE = algorithms.AES.block_size // 8
AES_KEY_SIZES = (16, 24, 32)


def _check_key(key: bytes) -> None:
    if len(key) not in AES_KEY_SIZES:
        raise KCMACValueError(
            "The key must be a valid AES key length: "
            f"{', '.join(str(k * 8) for k in AES_KEY_SIZES)}"
        )


def _check_blocks(data: bytes) -> None:
    if len(data) % AES_BLOCK_SIZE:
        raise KCMACAlignmentError(
            f"The data length must be a multiple of {AES_BLOCK_SIZE} bytes, got {len(data)}"
        )


def aes_ecb_encrypt(key: bytes, plain_data: bytes) -> bytes:
    """Encrypt plain data with AES in ECB mode.

    :param key: The encryption key in bytes format.
    :param plain_data: Input data to be encrypted, a multiple of the block size.
    :raises KCMACValueError: Invalid key length.
    :raises KCMACAlignmentError: Data is not block aligned.
    :return: Encrypted data in bytes format.
    """
    _check_key(key)
    _check_blocks(plain_data)
    cipher = Cipher(algorithms.AES(key), modes.ECB())  # nosec
    enc = cipher.encryptor()
    return enc.update(plain_data) + enc.finalize()


def aes_cbc_encrypt(key: bytes, plain_data: bytes, iv_data: Optional[bytes] = None) -> bytes:
    """Encrypt plain data with AES in CBC mode without padding.

    If no initialization vector is provided, a zero-filled IV is used.

    :param key: AES encryption key, must be valid AES key length (128, 192, or 256 bits).
    :param plain_data: Data to be encrypted, a multiple of the block size.
    :param iv_data: Initialization vector for CBC mode, defaults to zero-filled block.
    :raises KCMACValueError: Invalid key length or IV length.
    :raises KCMACAlignmentError: Data is not block aligned.
    :return: Encrypted data.
    """
    chain = AesCbcChain(key, iv_data)
    return chain.update(plain_data)


class AesCbcChain:
    """Streaming AES-CBC encryption without padding.

    The chaining state (the last ciphertext block) is carried by the underlying
    encryptor context, so consecutive calls of :meth:`update` produce the same
    ciphertext as a single call over the concatenated data.
    """

    def __init__(self, key: bytes, iv_data: Optional[bytes] = None) -> None:
        """Initialize the CBC chain.

        :param key: AES key of 128, 192 or 256 bits.
        :param iv_data: Initialization vector, defaults to zero-filled block.
        :raises KCMACValueError: Invalid key length or IV length.
        """
        _check_key(key)
        init_vector = iv_data or bytes(AES_BLOCK_SIZE)
        if len(init_vector) != AES_BLOCK_SIZE:
            raise KCMACValueError(f"The initial vector length must be {AES_BLOCK_SIZE}")
        self._encryptor = Cipher(algorithms.AES(key), modes.CBC(init_vector)).encryptor()
        self.blocks_count = 0

    def update(self, blocks: bytes) -> bytes:
        """Encrypt whole blocks, continuing the chain.

        :param blocks: Data to be encrypted, a multiple of the block size.
        :raises KCMACAlignmentError: Data is not block aligned.
        :return: Ciphertext of the same length.
        """
        _check_blocks(blocks)
        self.blocks_count += len(blocks) // AES_BLOCK_SIZE
        return self._encryptor.update(blocks)
