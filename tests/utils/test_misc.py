#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for KCMAC miscellaneous utilities."""

import os

import pytest

from kcmac import value_to_bool
from kcmac.exceptions import KCMACError, KCMACLengthError, KCMACValueError
from kcmac.utils.misc import (
    find_file,
    load_binary,
    load_configuration,
    load_hex_string,
    msb_set,
    pad_block,
    shift_left,
    split_data,
    write_file,
    xor_bytes,
)


def test_xor_bytes() -> None:
    assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
    with pytest.raises(KCMACLengthError):
        xor_bytes(b"\x00", b"\x00\x00")


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"\x00\x01", b"\x00\x02"),
        (b"\x00\x80", b"\x01\x00"),
        (b"\x80\x00", b"\x00\x00"),
        (b"\xff\xff", b"\xff\xfe"),
        (b"", b""),
    ],
)
def test_shift_left(data: bytes, expected: bytes) -> None:
    assert shift_left(data) == expected


def test_msb_set() -> None:
    assert msb_set(b"\x80\x00")
    assert not msb_set(b"\x7f\xff")
    assert not msb_set(b"")


@pytest.mark.parametrize("length", [0, 1, 8, 15])
def test_pad_block(length: int) -> None:
    padded = pad_block(b"\xaa" * length)
    assert len(padded) == 16
    assert padded[:length] == b"\xaa" * length
    assert padded[length] == 0x80
    assert padded[length + 1 :] == bytes(15 - length)


def test_pad_block_full() -> None:
    with pytest.raises(KCMACLengthError):
        pad_block(bytes(16))


def test_split_data() -> None:
    assert list(split_data(b"abcdefg", 3)) == [b"abc", b"def", b"g"]
    assert not list(split_data(b"", 3))


@pytest.mark.parametrize(
    "value,expected",
    [("True", True), ("true", True), ("T", True), ("1", True), ("0", False), ("no", False),
     (None, False), (1, True), (0, False)],
)
def test_value_to_bool(value: object, expected: bool) -> None:
    assert value_to_bool(value) is expected  # type: ignore[arg-type]


def test_load_hex_string(tmpdir: str) -> None:
    assert load_hex_string("0x0102") == b"\x01\x02"
    assert load_hex_string("01 02\n03") == b"\x01\x02\x03"
    assert load_hex_string("") == b""
    key_file = os.path.join(tmpdir, "key.txt")
    write_file("2b7e151628aed2a6abf7158809cf4f3c\n", key_file)
    assert load_hex_string(key_file) == bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
    with pytest.raises(KCMACValueError):
        load_hex_string("not a hex")


def test_write_and_load_binary(tmpdir: str) -> None:
    path = os.path.join(tmpdir, "sub", "data.bin")
    assert write_file(b"\x00\x01", path, mode="wb") == 2
    assert load_binary(path) == b"\x00\x01"
    assert find_file("data.bin", search_paths=[os.path.join(tmpdir, "sub")]) == path.replace(
        "\\", "/"
    )


def test_find_file_missing(tmpdir: str) -> None:
    with pytest.raises(KCMACError):
        find_file(os.path.join(tmpdir, "missing.txt"))
    assert find_file("missing.txt", search_paths=[str(tmpdir)], raise_exc=False) == ""


def test_load_configuration(tmpdir: str) -> None:
    yaml_file = os.path.join(tmpdir, "config.yaml")
    write_file("version: 1\nroot:\n  level: INFO\n", yaml_file)
    assert load_configuration(yaml_file) == {"version": 1, "root": {"level": "INFO"}}
    json_file = os.path.join(tmpdir, "config.json")
    write_file('{"version": 1}', json_file)
    assert load_configuration(json_file) == {"version": 1}
    list_file = os.path.join(tmpdir, "list.yaml")
    write_file("- 1\n- 2\n", list_file)
    with pytest.raises(KCMACError):
        load_configuration(list_file)
    with pytest.raises(KCMACError):
        load_configuration(os.path.join(tmpdir, "missing.yaml"))
