# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/protobuf.py
# DESCRIPTION:    Transport of configurations in protobuf Struct messages
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
# Contributor(s): Pavel Císař (original code)
#                 ______________________________________.

"""serialconf - Transport of configurations in protobuf `Struct` messages

Generic value maps produced by `.SerializationConfig.serialize` contain only
values that `google.protobuf.Struct` can hold, so configurations could be
transported (or stored) as `Struct` messages.

Important:
    `Struct` stores all numbers as doubles. `.DefaultSerializor` converts integral
    numbers back to `int` for properties declared as `int`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from google.protobuf import json_format
from google.protobuf.struct_pb2 import Struct as StructProto

from .config import SerializationConfig
from .registration import ConfigurationSerializable, deserialize_object, serialize_object

def struct2dict(struct: StructProto) -> dict[str, Any]:
    """Unpack a `google.protobuf.Struct` message into a Python dictionary.

    Uses `google.protobuf.json_format.MessageToDict`.
    """
    return json_format.MessageToDict(struct)

def dict2struct(value: Mapping[str, Any]) -> StructProto:
    """Pack a generic value map into a `google.protobuf.Struct` message.
    """
    struct = StructProto()
    struct.update(value)
    return struct

def config2struct(config: SerializationConfig) -> StructProto:
    """Returns `Struct` message with serialized configuration.
    """
    return dict2struct(config.serialize())

def struct2config(cls: type[SerializationConfig], struct: StructProto) -> SerializationConfig:
    """Returns new configuration of class `cls` deserialized from `Struct` message.
    """
    return cls.from_map(struct2dict(struct))

def object2struct(obj: ConfigurationSerializable) -> StructProto:
    """Returns `Struct` message with serialized object of registered class. The message
    carries the class alias, see `.serialize_object`.
    """
    return dict2struct(serialize_object(obj))

def struct2object(struct: StructProto) -> Any:
    """Returns new instance of registered class deserialized from `Struct` message
    created by `object2struct`.
    """
    return deserialize_object(struct2dict(struct))
