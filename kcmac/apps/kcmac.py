#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC command line tool for AES-CMAC computation and verification."""

import logging
import sys
import time
from typing import Callable, Optional

import click
from cryptography.hazmat.primitives import cmac as cmac_cls
from cryptography.hazmat.primitives.ciphers import algorithms

from kcmac import KCMAC_DEBUG
from kcmac.apps.utils import kcmac_logger
from kcmac.apps.utils.common_cli_options import (
    kcmac_algorithm_option,
    kcmac_apps_common_options,
    kcmac_data_options,
    kcmac_key_option,
)
from kcmac.apps.utils.utils import KCMACAppError, catch_kcmac_error
from kcmac.crypto.cmac import Cmac, Cmac96, CmacPrf128, MacComputer
from kcmac.crypto.exceptions import CMACTagMismatchError
from kcmac.utils.misc import load_binary, load_hex_string, split_data, write_file

logger = logging.getLogger(__name__)

MAC_CLASSES: dict[str, Callable[[bytes], MacComputer]] = {
    "cmac": Cmac,
    "cmac96": Cmac96,
    "prf128": CmacPrf128,
}
CHUNK_SIZE = 0x10000

BENCHMARK_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
BENCHMARK_MESSAGES = {
    "short_message": b"\x00",
    "block_message": bytes.fromhex("6bc1bee22e409f96e93d7e117393172a"),
    "long_message": bytes.fromhex("6bc1bee22e409f96e93d7e117393172a" + "117393172a" * 40 + "ff"),
}


def get_mac(algorithm: str, key: bytes) -> MacComputer:
    """Create MAC computation for the algorithm name.

    :param algorithm: One of cmac, cmac96, prf128.
    :param key: Key of the computation.
    :return: MAC computation instance.
    """
    return MAC_CLASSES[algorithm.lower()](key)


def compute_mac(
    algorithm: str, key: str, input_file: Optional[str], data: Optional[str]
) -> MacComputer:
    """Feed the command line input into a new MAC computation.

    :param algorithm: One of cmac, cmac96, prf128.
    :param key: Key hex-string or path to a file with it.
    :param input_file: Path to a binary file with the message.
    :param data: Message as hex-string.
    :raises KCMACAppError: Both the input file and data are specified.
    :return: MAC computation fed with the message, not finalized.
    """
    if input_file and data:
        raise KCMACAppError("Specify either input file or data, not both.")
    mac = get_mac(algorithm, load_hex_string(key))
    message = load_binary(input_file) if input_file else load_hex_string(data or "")
    logger.info(f"Computing {algorithm} over {len(message)} bytes")
    for chunk in split_data(message, CHUNK_SIZE):
        mac.update(chunk)
    return mac


@click.group(name="kcmac", no_args_is_help=True)
@kcmac_apps_common_options
def main(log_level: int) -> None:
    """KCMAC tool for AES-CMAC computation (RFC 4493, RFC 4494, RFC 4615)."""
    kcmac_logger.install(level=log_level or (logging.DEBUG if KCMAC_DEBUG else None))


@main.command(name="digest", no_args_is_help=True)
@kcmac_key_option
@kcmac_data_options
@kcmac_algorithm_option
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["hex", "base64", "bin"], case_sensitive=False),
    default="hex",
    show_default=True,
    help="Format of the MAC tag.",
)
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), help="Output file for the MAC tag."
)
def digest_command(
    key: str,
    input_file: Optional[str],
    data: Optional[str],
    algorithm: str,
    output_format: str,
    output: Optional[str],
) -> None:
    """Compute the MAC tag of the input data."""
    mac = compute_mac(algorithm, key, input_file, data)
    output_format = output_format.lower()
    if output_format == "bin":
        if not output:
            raise KCMACAppError("Binary format requires an output file.")
        write_file(mac.digest(), output, mode="wb")
        click.echo(f"MAC tag written to {output}")
        return
    tag = mac.hexdigest() if output_format == "hex" else mac.base64digest()
    if output:
        write_file(tag, output)
        click.echo(f"MAC tag written to {output}")
    else:
        click.echo(tag)


@main.command(name="verify", no_args_is_help=True)
@kcmac_key_option
@kcmac_data_options
@kcmac_algorithm_option
@click.option("-t", "--tag", required=True, type=str, help="Expected MAC tag as a hex-string.")
def verify_command(
    key: str, input_file: Optional[str], data: Optional[str], algorithm: str, tag: str
) -> None:
    """Verify the MAC tag of the input data."""
    mac = compute_mac(algorithm, key, input_file, data)
    try:
        mac.verify(load_hex_string(tag))
    except CMACTagMismatchError as exc:
        raise KCMACAppError(str(exc), error_code=1) from exc
    click.echo("MAC tag verified")


def _measure(update: Callable[[bytes], object], message: bytes, count: int) -> float:
    start = time.perf_counter()
    for _ in range(count):
        update(message)
    return time.perf_counter() - start


@main.command(name="benchmark")
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=100_000,
    show_default=True,
    help="Number of updates per measurement.",
)
def benchmark_command(count: int) -> None:
    """Measure streaming update speed against the cryptography CMAC."""
    for name, message in BENCHMARK_MESSAGES.items():
        own_mac = Cmac(BENCHMARK_KEY)
        reference = cmac_cls.CMAC(algorithms.AES(BENCHMARK_KEY))
        own_time = _measure(own_mac.update, message, count)
        ref_time = _measure(reference.update, message, count)
        click.echo(f"kcmac Cmac.update {name}: {own_time:.4f}s")
        click.echo(f"cryptography CMAC.update {name}: {ref_time:.4f}s")


@catch_kcmac_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
