# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           tests/test_serializor.py
# DESCRIPTION:    Tests for serialconf.serializor
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

"""serialconf - Unit tests for serialconf.serializor
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from sample_config import DerivedSubConfig, Level, SampleSubConfig

from serialconf.registration import TYPE_KEY, register_class
from serialconf.serializor import DefaultSerializor, Serializor, runtime_type
from serialconf.types import IllegalPropertyValueError

# --- Test Setup & Fixtures ---

class MapOnlySerializor(Serializor):
    """Serializor that does not support conversion from string."""
    def serialize(self, value: Any) -> Any:
        return {'value': value}
    def deserialize(self, value: Any, datatype: Any) -> Any:
        return value['value']

@pytest.fixture
def serializor() -> DefaultSerializor:
    """Returns default serializor."""
    return DefaultSerializor()

# --- Test Functions ---

def test_runtime_type():
    """Tests reduction of declared types to isinstance-compatible types."""
    assert runtime_type(int) is int
    assert runtime_type(Any) is object
    assert runtime_type(list[str]) is list
    assert runtime_type(dict[str, int]) is dict
    assert runtime_type(int | None) == (int, type(None))
    assert runtime_type(int | list[str]) == (int, list)

def test_serializor_defaults():
    """Tests default implementations of Serializor methods."""
    ser = MapOnlySerializor()
    assert ser.to_str(1) == "{'value': 1}"
    with pytest.raises(IllegalPropertyValueError, match="does not support deserialization from string"):
        ser.deserialize_from_str("1", int)

def test_serialize(serializor):
    """Tests conversion of native values to generic representation."""
    assert serializor.serialize(None) is None
    assert serializor.serialize("text") == "text"
    assert serializor.serialize(True) is True
    assert serializor.serialize(10) == 10
    assert serializor.serialize(1.5) == 1.5
    assert serializor.serialize(Level.HIGH) == "HIGH"
    assert serializor.serialize(Decimal("1.5")) == "1.5"
    assert serializor.serialize(("a", Level.LOW)) == ["a", "LOW"]
    assert serializor.serialize({1: Level.LOW}) == {"1": "LOW"}
    assert serializor.serialize(SampleSubConfig()) == {'value': 'subValue', 'limit': 10}
    obj = object()
    assert serializor.serialize(obj) is obj

def test_deserialize_plain(serializor):
    """Tests conversion of generic values to plain types."""
    assert serializor.deserialize(None, int) is None
    assert serializor.deserialize("text", str) == "text"
    assert serializor.deserialize(10, int) == 10
    assert serializor.deserialize(10.0, int) == 10
    assert isinstance(serializor.deserialize(10.0, int), int)
    assert serializor.deserialize(10, float) == 10.0
    assert isinstance(serializor.deserialize(10, float), float)
    assert serializor.deserialize("10", int) == 10
    assert serializor.deserialize("yes", bool) is True
    assert serializor.deserialize("HIGH", Level) is Level.HIGH
    assert serializor.deserialize("1.5", Decimal) == Decimal("1.5")
    assert serializor.deserialize(5, int | None) == 5
    assert serializor.deserialize({'a': 1}, Any) == {'a': 1}
    with pytest.raises(IllegalPropertyValueError):
        serializor.deserialize(10.5, int)
    with pytest.raises(IllegalPropertyValueError):
        serializor.deserialize(True, int)
    with pytest.raises(IllegalPropertyValueError):
        serializor.deserialize("abc", int)

def test_deserialize_collections(serializor):
    """Tests element-wise deserialization of lists and maps."""
    assert serializor.deserialize(["a", "b"], list[str]) == ["a", "b"]
    assert serializor.deserialize([1.0, 2.0], list[int]) == [1, 2]
    assert serializor.deserialize(["1", "2"], tuple[int]) == (1, 2)
    assert serializor.deserialize(["x"], list) == ["x"]
    assert serializor.deserialize({'a': "LOW"}, dict[str, Level]) == {'a': Level.LOW}
    values = serializor.deserialize([{'value': 'v1'}, {'value': 'v2'}], list[SampleSubConfig])
    assert [item.value for item in values] == ['v1', 'v2']

def test_deserialize_configuration(serializor):
    """Tests construction of nested configuration, with optional class alias."""
    cfg = serializor.deserialize({'value': 'changed'}, SampleSubConfig)
    assert type(cfg) is SampleSubConfig
    assert cfg.value == 'changed'
    # Unregistered alias is ignored
    cfg = serializor.deserialize({TYPE_KEY: 'derived', 'extra': 'x'}, SampleSubConfig)
    assert type(cfg) is SampleSubConfig
    register_class(DerivedSubConfig)
    cfg = serializor.deserialize({TYPE_KEY: 'derived', 'extra': 'x'}, SampleSubConfig)
    assert type(cfg) is DerivedSubConfig
    assert cfg.extra == 'x'
    # Registered class must be compatible with declared type
    register_class(SampleSubConfig, 'base')
    cfg = serializor.deserialize({TYPE_KEY: 'base'}, DerivedSubConfig)
    assert type(cfg) is DerivedSubConfig

def test_deserialize_from_str(serializor):
    """Tests conversion of strings to native values."""
    assert serializor.deserialize_from_str("text", str) == "text"
    assert serializor.deserialize_from_str("text", Any) == "text"
    assert serializor.deserialize_from_str("12", int) == 12
    assert serializor.deserialize_from_str("12", int | None) == 12
    assert serializor.deserialize_from_str("off", bool) is False
    with pytest.raises(IllegalPropertyValueError, match="is not a valid bool string constant"):
        serializor.deserialize_from_str("maybe", bool)
    with pytest.raises(IllegalPropertyValueError, match="Cannot convert string"):
        serializor.deserialize_from_str("a,b", list[str])

def test_to_str(serializor):
    """Tests string representation of native values."""
    assert serializor.to_str("text") == "text"
    assert serializor.to_str(10) == "10"
    assert serializor.to_str(True) == "true"
    assert serializor.to_str(Level.LOW) == "LOW"
    assert serializor.to_str(None) == "None"
    assert serializor.to_str(["a", "b"]) == "['a', 'b']"
