#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC CLI testing utilities."""

import traceback
from typing import Any

from click.testing import CliRunner as _CliRunner
from click.testing import Result


class CliRunner(_CliRunner):
    """CLI test runner validating the exit code of the invoked command."""

    def invoke(self, *args: Any, expected_code: int = 0, **kwargs: Any) -> Result:
        """Invoke CLI command with expected exit code validation.

        :param args: Arguments to be passed to the parent invoke method.
        :param expected_code: Expected exit code (default: 0). Use -1 to expect any non-zero code.
        :param kwargs: Keyword arguments to be passed to the parent invoke method.
        :return: Result object from the CLI command execution.
        """
        result = super().invoke(*args, **kwargs)

        if expected_code == -1:
            assert result.exit_code != 0, self._build_error_message(result, expected_code)
        else:
            assert result.exit_code == expected_code, self._build_error_message(
                result, expected_code
            )
        return result

    @staticmethod
    def _build_error_message(result: Result, expected_code: int) -> str:
        error_msg = f"Expected code: {expected_code}, Actual code: {result.exit_code} \n"
        if result.exception:
            error_msg += f"{result.exception}\n"
        error_msg += result.output
        if result.exc_info and result.exc_info[2]:
            extracted_list = traceback.extract_tb(result.exc_info[2])
            for item in traceback.StackSummary.from_list(extracted_list).format():
                error_msg += item
        return error_msg
