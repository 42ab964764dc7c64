#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC miscellaneous utilities and helper functions.

This module provides bit and byte level helpers used by the CMAC engine and
small file handling utilities used by the command line tool.
"""

import json
import logging
import os
from typing import Callable, Generator, Optional, Union

import yaml

from kcmac.exceptions import KCMACError, KCMACLengthError, KCMACValueError

logger = logging.getLogger(__name__)


def xor_bytes(data: bytes, mask: bytes) -> bytes:
    """XOR two byte strings of the same length.

    :param data: First operand.
    :param mask: Second operand.
    :raises KCMACLengthError: The operands differ in length.
    :return: Result of byte-wise XOR.
    """
    if len(data) != len(mask):
        raise KCMACLengthError(f"XOR requires equal-length inputs: {len(data)} != {len(mask)}")
    return bytes(a ^ b for a, b in zip(data, mask))


def shift_left(data: bytes) -> bytes:
    """Shift a byte string left by one bit, as a big-endian integer.

    The most significant bit is dropped; the result has the same length.

    :param data: Input byte string.
    :return: Shifted byte string.
    """
    bit_cnt = len(data) * 8
    value = (int.from_bytes(data, "big") << 1) & ((1 << bit_cnt) - 1)
    return value.to_bytes(len(data), "big")


def msb_set(data: bytes) -> bool:
    """Check whether the most significant bit of the byte string is set."""
    return bool(data and data[0] & 0x80)


def pad_block(data: bytes, block_size: int = 16) -> bytes:
    """Pad data with a single 0x80 byte followed by zeros up to the block size.

    This is the ISO/IEC 7816-4 padding (bit string "10...0") used on incomplete
    final blocks.

    :param data: Incomplete block, shorter than the block size.
    :param block_size: Size of the block in bytes, defaults to 16.
    :raises KCMACLengthError: The data is not shorter than the block size.
    :return: Padded block.
    """
    if len(data) >= block_size:
        raise KCMACLengthError(f"Padded data must be shorter than {block_size} bytes")
    return data + b"\x80" + bytes(block_size - len(data) - 1)


def split_data(data: Union[bytearray, bytes], size: int) -> Generator[bytes, None, None]:
    """Split data into chunks of specified size.

    :param data: Array of bytes to be split into chunks.
    :param size: Size of each chunk in bytes.
    :return: Generator yielding byte chunks of the specified size.
    """
    for i in range(0, len(data), size):
        yield data[i : i + size]


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def _find_path(
    path: str,
    check_func: Callable[[str], bool],
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find and return the full path to a file or directory.

    Search paths take precedence over current working directory.

    :param path: File name, part of file path or full path to search for.
    :param check_func: Function to validate if the found path exists and meets criteria.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file or empty string if not found and raise_exc is False.
    :raises KCMACError: File not found in any of the searched locations.
    """
    path = path.replace("\\", "/")

    if os.path.isabs(path):
        if not check_func(path):
            if raise_exc:
                raise KCMACError(f"Path '{path}' not found")
            return ""
        return path
    for dir_candidate in search_paths or []:
        if not dir_candidate:
            continue
        path_candidate = get_abs_path(path, base_dir=dir_candidate.replace("\\", "/"))
        if check_func(path_candidate):
            return path_candidate
    if check_func(path):
        return get_abs_path(path)
    searched_in = [os.path.abspath(os.curdir)] + list(filter(None, search_paths or []))
    err_str = f"Path '{path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise KCMACError(err_str)


def find_file(
    file_path: str, search_paths: Optional[list[str]] = None, raise_exc: bool = True
) -> str:
    """Find file in filesystem.

    :param file_path: File name, part of file path or full path to search for.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file.
    :raises KCMACError: File not found in any of the search locations.
    """
    return _find_path(
        path=file_path, check_func=os.path.isfile, search_paths=search_paths, raise_exc=raise_exc
    )


def load_file(
    path: str, mode: str = "r", search_paths: Optional[list[str]] = None
) -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    with open(path, mode, encoding=encoding) as f:
        return f.read()


def load_binary(path: str, search_paths: Optional[list[str]] = None) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb", search_paths=search_paths)
    assert isinstance(data, bytes)
    return data


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r", search_paths=search_paths)
    assert isinstance(text, str)
    return text


def write_file(data: Union[str, bytes], path: str, mode: str = "w") -> int:
    """Write data into a file, creating missing parent directories.

    :param data: Data to write.
    :param path: Path to the file.
    :param mode: Writing mode, 'w' for text or 'wb' for binary.
    :return: Number of written elements.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    encoding = None if "b" in mode else "utf-8"
    with open(path, mode, encoding=encoding) as f:
        return f.write(data)


def load_hex_string(source: str, search_paths: Optional[list[str]] = None) -> bytes:
    """Load hexadecimal data given directly or stored in a text file.

    :param source: Hexadecimal string (optionally 0x prefixed) or path to a file containing it.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises KCMACValueError: The source is neither a file nor a valid hexadecimal string.
    :return: Decoded data.
    """
    file_path = find_file(source, search_paths=search_paths, raise_exc=False)
    text = load_text(file_path) if file_path else source
    text = "".join(text.split())
    if text.startswith(("0x", "0X")):
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise KCMACValueError(f"Invalid hexadecimal input: {source}") from exc


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises KCMACError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise KCMACError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise KCMACError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise KCMACError(f"Invalid configuration file: {path}")

    return config_data
