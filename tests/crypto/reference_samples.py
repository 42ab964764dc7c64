#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Published AES-CMAC reference vectors.

NIST SP 800-38B examples for AES-128/192/256, RFC 4494 examples for
AES-CMAC-96 and RFC 4615 examples for AES-CMAC-PRF-128.
"""

from typing import NamedTuple

import pytest

M_16 = "6bc1bee22e409f96e93d7e117393172a"
M_20 = M_16 + "ae2d8a57"
M_40 = M_16 + "ae2d8a571e03ac9c9eb76fac45af8e5130c81c46a35ce411"
M_64 = M_40 + "e5fbc1191a0a52eff69f2445df4f9b17ad2b417be66c3710"


class Sample(NamedTuple):
    """Reference sample: hex encoded key, message and expected tag."""

    key: str
    data: str
    tag: str


AES_128_KEY = "2b7e151628aed2a6abf7158809cf4f3c"
AES_192_KEY = "8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b"
AES_256_KEY = "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"

AES_128 = {
    "empty": Sample(AES_128_KEY, "", "bb1d6929e95937287fa37d129b756746"),
    "single_block": Sample(AES_128_KEY, M_16, "070a16b46b4d4144f79bdd9dd04a287c"),
    "non_multiple_block": Sample(AES_128_KEY, M_20, "7d85449ea6ea19c823a7bf78837dfade"),
    "multiple_block": Sample(AES_128_KEY, M_64, "51f0bebf7e3b9d92fc49741779363cfe"),
}

AES_192 = {
    "empty": Sample(AES_192_KEY, "", "d17ddf46adaacde531cac483de7a9367"),
    "single_block": Sample(AES_192_KEY, M_16, "9e99a7bf31e710900662f65e617c5184"),
    "non_multiple_block": Sample(AES_192_KEY, M_20, "3d75c194ed96070444a9fa7ec740ecf8"),
    "multiple_block": Sample(AES_192_KEY, M_64, "a1d5df0eed790f794d77589659f39a11"),
}

AES_256 = {
    "empty": Sample(AES_256_KEY, "", "028962f61b7bf89efc6b551f4667d983"),
    "single_block": Sample(AES_256_KEY, M_16, "28a7023f452e8f82bd4bf28d8c37c35c"),
    "non_multiple_block": Sample(AES_256_KEY, M_20, "156727dc0878944a023c1fe03bad6d93"),
    "multiple_block": Sample(AES_256_KEY, M_64, "e1992190549f6ed5696a2c056c315410"),
}

AES_CMAC_96 = {
    "empty": Sample(AES_128_KEY, "", "bb1d6929e95937287fa37d12"),
    "single_block": Sample(AES_128_KEY, M_16, "070a16b46b4d4144f79bdd9d"),
    "non_multiple_block": Sample(AES_128_KEY, M_40, "dfa66747de9ae63030ca3261"),
    "multiple_block": Sample(AES_128_KEY, M_64, "51f0bebf7e3b9d92fc497417"),
}

PRF_128_DATA = "000102030405060708090a0b0c0d0e0f10111213"
AES_PRF_128 = {
    "key_length_18": Sample(
        "000102030405060708090a0b0c0d0e0fedcb", PRF_128_DATA, "84a348a4a45d235babfffc0d2b4da09a"
    ),
    "key_length_16": Sample(
        "000102030405060708090a0b0c0d0e0f", PRF_128_DATA, "980ae87b5f4c9c5214f5b6a8455e4c2d"
    ),
    "key_length_10": Sample(
        "00010203040506070809", PRF_128_DATA, "290d9e112edb09ee141fcf64c0b72f3d"
    ),
}


def as_params(samples: dict[str, Sample]) -> list:
    """Convert samples to pytest parameters with readable ids."""
    return [pytest.param(sample, id=name) for name, sample in samples.items()]
