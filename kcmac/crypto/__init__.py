#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KCMAC cryptographic operations module.

This module provides the AES-CMAC engine with its truncated and PRF variants,
the AES block cipher adapter and constant-time comparison helpers.
"""
