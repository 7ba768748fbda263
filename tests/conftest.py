# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           tests/conftest.py
# DESCRIPTION:    Shared fixtures for serialconf tests
# CREATED:        18.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Copyright (c) 2026 The serialconf Project
# All Rights Reserved.
#
# Contributor(s): ______________________________________.

"""serialconf - Shared fixtures for serialconf tests
"""

from __future__ import annotations

import logging

import pytest
from sample_config import SampleConfig, SampleSubConfig

from serialconf import registration
from serialconf.alias import _aliases
from serialconf.logging import logging_manager


@pytest.fixture(autouse=True)
def reset_framework():
    """Resets global framework state before and after each test.
    """
    logging_manager.reset()
    registration.clear()
    _aliases.clear()
    yield
    logging_manager.reset()
    registration.clear()
    _aliases.clear()

@pytest.fixture
def debug_log(caplog):
    """Captures DEBUG records of all framework loggers.
    """
    caplog.set_level(logging.DEBUG, logger='serialconf')
    return caplog

@pytest.fixture
def config() -> SampleConfig:
    """Returns sample configuration with default values.
    """
    return SampleConfig()

@pytest.fixture
def sub_config() -> SampleSubConfig:
    """Returns nested sample configuration with default values.
    """
    return SampleSubConfig()
