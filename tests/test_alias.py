# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           tests/test_alias.py
# DESCRIPTION:    Tests for serialconf.alias
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

"""serialconf - Unit tests for serialconf.alias
"""

from __future__ import annotations

from sample_config import BrokenAliasConfig, OptionalConfig, SampleConfig, SampleSubConfig

from serialconf.alias import get_alias_map, register_alias, resolve_alias

# --- Test Setup ---

class DerivedConfig(SampleConfig):
    """Configuration that inherits alias supplier."""

class BadAliasConfig(OptionalConfig):
    """Configuration with alias supplier returning wrong data."""
    @staticmethod
    def get_aliases():
        return {'alias': 1}

# --- Test Functions ---

def test_default_aliases():
    """Tests alias table seeded from class alias supplier."""
    assert get_alias_map(SampleConfig) == {'firstAlias': 'first', 'child': 'sub'}
    assert resolve_alias(SampleConfig, 'firstAlias') == 'first'
    assert resolve_alias(SampleConfig, 'first') == 'first'
    assert resolve_alias(SampleConfig, 'unknown') == 'unknown'
    assert get_alias_map(SampleSubConfig) == {}

def test_supplier_not_inherited():
    """Tests that alias supplier of base class is not used by subclasses."""
    assert get_alias_map(DerivedConfig) == {}
    assert resolve_alias(DerivedConfig, 'firstAlias') == 'firstAlias'

def test_failing_supplier(debug_log):
    """Tests that failing or invalid alias supplier results in empty table."""
    assert get_alias_map(BrokenAliasConfig) == {}
    assert "Alias supplier of 'BrokenAliasConfig' failed" in debug_log.text
    assert get_alias_map(BadAliasConfig) == {}

def test_register_alias():
    """Tests registration and replacement of aliases."""
    register_alias(SampleSubConfig, 'val', 'value')
    assert resolve_alias(SampleSubConfig, 'val') == 'value'
    register_alias(SampleConfig, 'firstAlias', 'keyword')
    assert resolve_alias(SampleConfig, 'firstAlias') == 'keyword'
    # Supplied aliases are kept
    assert resolve_alias(SampleConfig, 'child') == 'sub'
    # Tables are per class
    assert resolve_alias(SampleConfig, 'val') == 'val'

def test_live_table():
    """Tests that returned alias table is live."""
    table = get_alias_map(SampleSubConfig)
    table['lim'] = 'limit'
    assert resolve_alias(SampleSubConfig, 'lim') == 'limit'
    register_alias(SampleSubConfig, 'val', 'value')
    assert table['val'] == 'value'
