# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           tests/test_registration.py
# DESCRIPTION:    Tests for serialconf.registration
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

"""serialconf - Unit tests for serialconf.registration
"""

from __future__ import annotations

import pytest
from sample_config import DerivedSubConfig, SampleConfig, SampleSubConfig

from serialconf.registration import (
    TYPE_KEY,
    ConfigurationSerializable,
    deserialize_object,
    get_class,
    get_class_alias,
    is_registered,
    register_class,
    serialize_object,
    unregister_class,
)
from serialconf.types import Error

# --- Test Setup ---

class Plain:
    """Class that is not ConfigurationSerializable."""

class Serializable:
    """ConfigurationSerializable class that is not a configuration."""
    def __init__(self, values=None):
        self.values = dict(values or {})
    def serialize(self):
        return dict(self.values)

# --- Test Functions ---

def test_protocol():
    """Tests structural recognition of serializable classes."""
    assert issubclass(SampleConfig, ConfigurationSerializable)
    assert issubclass(Serializable, ConfigurationSerializable)
    assert isinstance(Serializable(), ConfigurationSerializable)
    assert not issubclass(Plain, ConfigurationSerializable)

def test_class_alias():
    """Tests default aliases."""
    assert get_class_alias(SampleSubConfig) == "sample_config.SampleSubConfig"
    assert get_class_alias(DerivedSubConfig) == "derived"

def test_register_class():
    """Tests registration, lookup and unregistration."""
    assert not is_registered(Serializable)
    register_class(Serializable)
    alias = get_class_alias(Serializable)
    assert is_registered(Serializable)
    assert is_registered(alias)
    assert get_class(alias) is Serializable
    register_class(Serializable, "serializable")
    assert get_class("serializable") is Serializable
    # Registering alias again replaces the class
    register_class(SampleSubConfig, "serializable")
    assert get_class("serializable") is SampleSubConfig
    unregister_class(Serializable)
    assert not is_registered(Serializable)
    assert not is_registered(alias)
    unregister_class("serializable")
    assert get_class("serializable") is None
    # Unknown class or alias is ignored
    unregister_class("unknown")
    unregister_class(Plain)

def test_register_not_serializable():
    """Tests that only ConfigurationSerializable classes can be registered."""
    with pytest.raises(TypeError, match="is not ConfigurationSerializable"):
        register_class(Plain)
    with pytest.raises(TypeError, match="is not ConfigurationSerializable"):
        register_class(Serializable())

def test_serialize_object():
    """Tests serialization of registered object with its alias."""
    obj = Serializable({'a': 1})
    with pytest.raises(Error, match="is not registered"):
        serialize_object(obj)
    register_class(Serializable, "ser")
    values = serialize_object(obj)
    assert values == {TYPE_KEY: 'ser', 'a': 1}
    assert list(values)[0] == TYPE_KEY

def test_deserialize_object():
    """Tests construction of registered object from value map."""
    register_class(Serializable, "ser")
    obj = deserialize_object({TYPE_KEY: 'ser', 'a': 1})
    assert isinstance(obj, Serializable)
    assert obj.values == {'a': 1}
    with pytest.raises(Error, match="does not specify class alias"):
        deserialize_object({'a': 1})
    with pytest.raises(Error, match="Unknown class alias 'unknown'"):
        deserialize_object({TYPE_KEY: 'unknown'})

def test_configuration_round_trip():
    """Tests serialize_object/deserialize_object with configuration object."""
    register_class(SampleSubConfig)
    cfg = SampleSubConfig({'value': 'changed'})
    values = serialize_object(cfg)
    assert values[TYPE_KEY] == "sample_config.SampleSubConfig"
    new = deserialize_object(values)
    assert isinstance(new, SampleSubConfig)
    assert new.value == 'changed'
    assert new.limit == 10
