#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC CMAC (Cipher-based Message Authentication Code) implementation.

Calculates a message authentication code for a message using AES as the block
cipher, as described in NIST SP 800-38B and RFC 4493. The AES key size can be
128, 192 or 256 bits, selecting the AES version used. The MAC size is always
128 bits.

Two derived constructions are provided:

* :class:`Cmac96` - AES-CMAC-96 (RFC 4494), the tag truncated to 96 bits.
* :class:`CmacPrf128` - AES-CMAC-PRF-128 (RFC 4615), accepting keys of any
  length, which are first normalized to 128 bits by CMAC itself.

The computation can be fed in multiple :meth:`Cmac.update` calls (or with the
``<<`` operator) and is finalized by :meth:`Cmac.digest`, which may also take
the last piece of data for a one-shot computation::

    tag = Cmac(key).digest(message)
    tag = Cmac(key).update(part1).update(part2).digest()
"""

import base64
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from kcmac.crypto.exceptions import (
    CMACAlreadyFinalizedError,
    CMACInvalidKeyLengthError,
    CMACTagMismatchError,
)
from kcmac.crypto.symmetric import AES_BLOCK_SIZE, AES_KEY_SIZES, AesCbcChain, aes_ecb_encrypt
from kcmac.crypto.utils import BytesLike, secure_compare, to_bytes
from kcmac.utils.misc import msb_set, pad_block, shift_left, xor_bytes

logger = logging.getLogger(__name__)

# Constant for subkey generation with a 128-bit block cipher, the same for all AES key lengths
RB = 0x87
BLOCK_OF_ZEROS = bytes(AES_BLOCK_SIZE)
CMAC_96_TAG_SIZE = 12
PRF_128_KEY_SIZE = 16

MacData = Union[BytesLike, str]


def double_block(block: bytes) -> bytes:
    """Multiply the block by x in GF(2^128).

    The block is shifted left by one bit; if its most significant bit was set,
    the last byte is XORed with RB (reduction polynomial x^128 + x^7 + x^2 + x + 1).

    :param block: 16-byte block.
    :return: Doubled block.
    """
    doubled = shift_left(block)
    if msb_set(block):
        doubled = doubled[:-1] + bytes([doubled[-1] ^ RB])
    return doubled


def generate_subkeys(key: bytes) -> tuple[bytes, bytes, bytes]:
    """Generate CMAC subkeys.

    L = AES(key, 0^128), K1 = double(L), K2 = double(K1)

    :param key: AES key.
    :return: Tuple of K1, K2 and L.
    """
    l_block = aes_ecb_encrypt(key, BLOCK_OF_ZEROS)
    k1 = double_block(l_block)
    k2 = double_block(k1)
    return k1, k2, l_block


class MacComputer(ABC):
    """Interface of a streaming MAC computation.

    Implementations provide :meth:`update` and :meth:`digest`, the encoded
    digests, verification and comparison are derived from them.
    """

    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def update(self, data: Optional[MacData]) -> "MacComputer":
        """Feed data into the computation.

        :param data: Data to authenticate, None or empty data is ignored.
        :return: The instance itself to allow chaining.
        """

    @abstractmethod
    def digest(self, data: Optional[MacData] = None) -> bytes:
        """Finalize the computation and return the MAC tag.

        :param data: Optional data fed into the computation before finalization.
        :return: MAC tag.
        """

    def __lshift__(self, data: Optional[MacData]) -> "MacComputer":
        return self.update(data)

    def hexdigest(self, data: Optional[MacData] = None) -> str:
        """Return the MAC tag as hexadecimal string.

        :param data: Optional data fed into the computation before finalization.
        :return: MAC tag encoded as lowercase hex string.
        """
        return self.digest(data).hex()

    def base64digest(self, data: Optional[MacData] = None) -> str:
        """Return the MAC tag as Base64 string.

        :param data: Optional data fed into the computation before finalization.
        :return: MAC tag encoded as Base64 string without line breaks.
        """
        return base64.b64encode(self.digest(data)).decode("ascii")

    def verify(self, tag: BytesLike, data: Optional[MacData] = None) -> bool:
        """Verify the MAC tag against the computed one.

        The tags are compared in constant time.

        :param tag: Expected MAC tag.
        :param data: Optional data fed into the computation before finalization.
        :raises CMACTagMismatchError: The tags do not match.
        :return: Always True, a mismatch raises.
        """
        if not secure_compare(tag, self.digest(data)):
            logger.debug(f"{self.__class__.__name__} tag verification failed")
            raise CMACTagMismatchError("MAC tag verification failed, the tags do not match")
        return True

    def __eq__(self, other: Any) -> bool:
        """Compare finalized tags of two computations of the same kind in constant time."""
        if not isinstance(other, MacComputer):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return secure_compare(self.digest(), other.digest())


class Cmac(MacComputer):
    """AES-CMAC computation (RFC 4493).

    The instance is active until the first :meth:`digest` call, which produces
    the MAC tag and finalizes it. After that, the tag may be read again but no
    more data can be added.
    """

    def __init__(self, key: BytesLike) -> None:
        """Initialize the CMAC computation.

        :param key: AES key of 128, 192 or 256 bits selecting the AES version.
        :raises CMACInvalidKeyLengthError: The key has invalid length.
        """
        key = to_bytes(key)
        if len(key) not in AES_KEY_SIZES:
            raise CMACInvalidKeyLengthError("Key must be 128, 192, or 256 bits long")
        self._key = key
        self._k1, self._k2, self._l = generate_subkeys(key)
        # Pending data, at most one block is kept after each update
        self._buffer = bytearray()
        self._chain = AesCbcChain(key)
        self._mac_tag: Optional[bytes] = None
        logger.debug(f"{self.__class__.__name__} initialized with AES-{len(key) * 8}")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} AES-{len(self._key) * 8} finalized={self.finalized}>"

    @property
    def key(self) -> bytes:
        """AES key of the computation."""
        return self._key

    @property
    def k1(self) -> bytes:
        """Subkey applied on a complete last block."""
        return self._k1

    @property
    def k2(self) -> bytes:
        """Subkey applied on a padded last block."""
        return self._k2

    @property
    def l(self) -> bytes:  # noqa: E743
        """Encrypted zero block the subkeys are derived from."""
        return self._l

    @property
    def mac_tag(self) -> Optional[bytes]:
        """MAC tag, None until the computation is finalized."""
        return self._mac_tag

    @property
    def finalized(self) -> bool:
        """True once the MAC tag has been produced."""
        return self._mac_tag is not None

    def update(self, data: Optional[MacData]) -> "Cmac":
        """Feed data into the computation.

        All complete blocks except the last one are encrypted right away. The last
        block is always kept back, even if complete, as its processing depends on
        whether more data follows.

        :param data: Data to authenticate, None or empty data is ignored.
        :raises CMACAlreadyFinalizedError: The computation has already been finalized.
        :return: The instance itself to allow chaining.
        """
        if data is None:
            return self
        data = to_bytes(data)
        if not data:
            return self
        if self.finalized:
            raise CMACAlreadyFinalizedError("CMAC has already been finalized")

        self._buffer += data
        if len(self._buffer) <= AES_BLOCK_SIZE:
            return self

        remainder = len(self._buffer) % AES_BLOCK_SIZE or AES_BLOCK_SIZE
        split = len(self._buffer) - remainder
        self._chain.update(bytes(self._buffer[:split]))
        del self._buffer[:split]
        return self

    def digest(self, data: Optional[MacData] = None) -> bytes:
        """Finalize the computation and return the MAC tag.

        Repeated calls without data return the same tag.

        :param data: Optional data fed into the computation before finalization.
        :raises CMACAlreadyFinalizedError: Data given after the computation was finalized.
        :return: 16-byte MAC tag.
        """
        if self._mac_tag is not None:
            if data is not None:
                raise CMACAlreadyFinalizedError("CMAC has already been finalized")
            return self._mac_tag

        self.update(data)
        self._mac_tag = self._chain.update(self._last_block())
        self._buffer.clear()
        logger.debug(
            f"{self.__class__.__name__} finalized after {self._chain.blocks_count} block(s)"
        )
        return self._mac_tag

    def _last_block(self) -> bytes:
        if len(self._buffer) == AES_BLOCK_SIZE:
            return xor_bytes(bytes(self._buffer), self._k1)
        return xor_bytes(pad_block(bytes(self._buffer), AES_BLOCK_SIZE), self._k2)


class Cmac96(Cmac):
    """AES-CMAC-96 computation (RFC 4494).

    Computes the regular 128-bit tag and truncates it to 96 bits.
    """

    @property
    def mac_tag(self) -> Optional[bytes]:
        """Truncated MAC tag, None until the computation is finalized."""
        return None if self._mac_tag is None else self._mac_tag[:CMAC_96_TAG_SIZE]

    def digest(self, data: Optional[MacData] = None) -> bytes:
        """Finalize the computation and return the 96-bit MAC tag.

        :param data: Optional data fed into the computation before finalization.
        :raises CMACAlreadyFinalizedError: Data given after the computation was finalized.
        :return: 12-byte MAC tag.
        """
        return super().digest(data)[:CMAC_96_TAG_SIZE]


def derive_prf_key(key: BytesLike) -> bytes:
    """Derive 128-bit key for AES-CMAC-PRF-128.

    A 128-bit key is used as it is, any other key is replaced by its CMAC
    computed with an all-zero 128-bit key.

    :param key: Key of arbitrary length.
    :return: 16-byte key.
    """
    key = to_bytes(key)
    if len(key) == PRF_128_KEY_SIZE:
        return key
    logger.debug(f"Deriving 128-bit PRF key from {len(key)}-byte key")
    return Cmac(BLOCK_OF_ZEROS).digest(key)


class CmacPrf128(MacComputer):
    """AES-CMAC-PRF-128 computation (RFC 4615).

    Keys of any length are supported, the computation always uses AES-128 with
    a key derived by :func:`derive_prf_key`. All operations are forwarded to the
    owned :class:`Cmac` instance.
    """

    def __init__(self, key: BytesLike) -> None:
        """Initialize the PRF computation.

        :param key: Key of arbitrary length.
        """
        self._key = derive_prf_key(key)
        self._cmac = Cmac(self._key)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} finalized={self.finalized}>"

    @property
    def key(self) -> bytes:
        """Derived 128-bit key."""
        return self._key

    @property
    def cmac(self) -> Cmac:
        """Underlying CMAC computation."""
        return self._cmac

    @property
    def mac_tag(self) -> Optional[bytes]:
        """MAC tag, None until the computation is finalized."""
        return self._cmac.mac_tag

    @property
    def finalized(self) -> bool:
        """True once the MAC tag has been produced."""
        return self._cmac.finalized

    def update(self, data: Optional[MacData]) -> "CmacPrf128":
        """Feed data into the computation.

        :param data: Data to authenticate, None or empty data is ignored.
        :raises CMACAlreadyFinalizedError: The computation has already been finalized.
        :return: The instance itself to allow chaining.
        """
        self._cmac.update(data)
        return self

    def digest(self, data: Optional[MacData] = None) -> bytes:
        """Finalize the computation and return the MAC tag.

        :param data: Optional data fed into the computation before finalization.
        :raises CMACAlreadyFinalizedError: Data given after the computation was finalized.
        :return: 16-byte MAC tag.
        """
        return self._cmac.digest(data)

    def verify(self, tag: BytesLike, data: Optional[MacData] = None) -> bool:
        """Verify the MAC tag against the computed one.

        :param tag: Expected MAC tag.
        :param data: Optional data fed into the computation before finalization.
        :raises CMACTagMismatchError: The tags do not match.
        :return: Always True, a mismatch raises.
        """
        return self._cmac.verify(tag, data)


def cmac(key: bytes, data: bytes) -> bytes:
    """Compute AES-CMAC for given data.

    :param key: AES key in bytes format.
    :param data: Input data to be authenticated.
    :return: CMAC authentication code.
    """
    return Cmac(key).digest(data)


def cmac_validate(key: bytes, data: bytes, signature: bytes) -> bool:
    """Validate AES-CMAC signature against provided data using specified key.

    :param key: AES key in bytes format.
    :param data: Input data in bytes format to be validated.
    :param signature: CMAC signature in bytes format to validate against.
    :return: True if signature is valid, False otherwise.
    """
    try:
        return Cmac(key).verify(signature, data)
    except CMACTagMismatchError:
        return False
