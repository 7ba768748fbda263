# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/serializor.py
# DESCRIPTION:    Property value serializors
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

"""serialconf - Property value serializors

A serializor converts the native value of a property to the generic value
representation (values allowed in generic value maps: `None`, `str`, `int`,
`float`, `bool`, lists and string-keyed dicts of such values) and back. It
also converts strings to native values for string-based property setting.

Serializors are instantiated per owning configuration object by the
`.serializor_cache`. A serializor class may accept the owning object as the
only constructor argument.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Set
from enum import Enum
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from .registration import TYPE_KEY, ConfigurationSerializable, get_class
from .strconv import convert_from_str, convert_to_str, has_convertor
from .types import IllegalPropertyValueError

#: Types passed through unchanged by `DefaultSerializor`.
PLAIN_TYPES: tuple[type, ...] = (str, bool, int, float)

def runtime_type(datatype: Any) -> type | tuple:
    """Returns type (or tuple of types) usable with `isinstance` for a declared type.

    Generic aliases are reduced to their origin (``list[str]`` -> `list`), unions
    to tuple of their members, and `~typing.Any` to `object`.
    """
    if datatype is Any:
        return object
    origin = get_origin(datatype)
    if origin in (Union, UnionType):
        return tuple(runtime_type(arg) for arg in get_args(datatype))
    return datatype if origin is None else origin

def _optional_type(datatype: Any) -> Any:
    # 'X | None' -> X
    if get_origin(datatype) in (Union, UnionType):
        args = [arg for arg in get_args(datatype) if arg is not NoneType]
        if len(args) == 1:
            return args[0]
    return datatype

class Serializor(ABC):
    """Abstract base class for property value serializors.
    """
    @abstractmethod
    def serialize(self, value: Any) -> Any:
        """Returns generic representation of native `value`.
        """
    @abstractmethod
    def deserialize(self, value: Any, datatype: Any) -> Any:
        """Returns native value of `datatype` from its generic representation.

        Returning `None` means that there is no value (the property keeps its current
        value when the object is constructed from generic value map).

        Raises:
            IllegalPropertyValueError: When value cannot be converted.
        """
    def deserialize_from_str(self, value: str, datatype: Any) -> Any:
        """Returns native value of `datatype` from string.

        The default implementation does not support conversion from string.

        Raises:
            IllegalPropertyValueError: When value cannot be converted.
        """
        raise IllegalPropertyValueError(f"{self.__class__.__name__} does not support "
                                        "deserialization from string", value=value)
    def to_str(self, value: Any) -> str:
        """Returns string representation of native `value`.
        """
        return str(self.serialize(value))

class DefaultSerializor(Serializor):
    """Serializor used for properties that do not specify one.

    - `None`, strings, booleans and numbers are passed through unchanged.
    - `.ConfigurationSerializable` objects (nested configurations) are serialized by
      their own `serialize()` method, and constructed from the generic map. A map that
      carries registered class alias under `.TYPE_KEY` constructs the registered class.
    - Lists, tuples and sets are serialized element-wise into lists that preserve
      order, and deserialized element-wise using the item type of the declared type
      (e.g. ``list[SubConfig]``).
    - Mappings are serialized value-wise into dicts with string keys.
    - Enums are serialized by member name.
    - Other values are serialized to string when a string convertor is registered
      for their type (see `.strconv`), otherwise passed unchanged.

    Conversion from string uses the string convertors registered in `.strconv`.
    """
    def serialize(self, value: Any) -> Any:
        if value is None or isinstance(value, PLAIN_TYPES):
            return value
        if isinstance(value, ConfigurationSerializable):
            return value.serialize()
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, Mapping):
            return {str(key): self.serialize(item) for key, item in value.items()}
        if isinstance(value, list | tuple | Set):
            return [self.serialize(item) for item in value]
        if has_convertor(type(value)):
            return convert_to_str(value)
        return value
    def deserialize(self, value: Any, datatype: Any) -> Any:
        if value is None:
            return None
        datatype = _optional_type(datatype)
        cls = runtime_type(datatype)
        if not isinstance(cls, type) or cls is object:
            return value
        if issubclass(cls, ConfigurationSerializable) and isinstance(value, Mapping):
            return self._deserialize_object(value, cls)
        if issubclass(cls, list | tuple | Set) and not isinstance(value, str | Mapping):
            args = get_args(datatype)
            item_type = args[0] if args else Any
            return cls(self.deserialize(item, item_type) for item in value)
        if issubclass(cls, Mapping) and isinstance(value, Mapping):
            args = get_args(datatype)
            item_type = args[1] if len(args) == 2 else Any
            return {key: self.deserialize(item, item_type) for key, item in value.items()}
        if isinstance(value, cls) and not (cls is int and isinstance(value, bool)):
            return value
        if cls is int and isinstance(value, float) and value.is_integer():
            # Numbers from some transports (e.g. protobuf Struct) are always doubles
            return int(value)
        if cls is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if isinstance(value, str):
            return self.deserialize_from_str(value, datatype)
        raise IllegalPropertyValueError(f"Cannot convert '{type(value).__name__}' "
                                        f"to '{cls.__name__}'", value=value)
    def deserialize_from_str(self, value: str, datatype: Any) -> Any:
        datatype = _optional_type(datatype)
        cls = runtime_type(datatype)
        if cls is str or cls is object:
            return value
        if not isinstance(cls, type) or not has_convertor(cls):
            raise IllegalPropertyValueError(f"Cannot convert string to '{datatype!r}'",
                                            value=value)
        try:
            return convert_from_str(cls, value)
        except ValueError as exc:
            raise IllegalPropertyValueError(str(exc), value=value) from exc
    def to_str(self, value: Any) -> str:
        if value is not None and has_convertor(type(value)):
            return convert_to_str(value)
        return str(self.serialize(value))
    def _deserialize_object(self, value: Mapping, cls: type) -> Any:
        if (alias := value.get(TYPE_KEY)) is not None:
            registered = get_class(alias)
            if registered is not None and issubclass(registered, cls):
                cls = registered
            value = {k: v for k, v in value.items() if k != TYPE_KEY}
        return cls(value)
