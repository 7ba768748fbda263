# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/property.py
# DESCRIPTION:    Property markers and descriptor tables
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

"""serialconf - Property markers and descriptor tables

Configuration classes declare their properties as class attributes holding a
`Property` marker::

    class ServerConfig(SerializationConfig):
        host: str = Property()
        port: int = Property(validator=PortValidator)
        timeout = Property(float)
        counter: VirtualProperty[int] = Property()

The declared type is taken from the class annotation, unless it is passed to
`Property` explicitly. Properties annotated with `VirtualProperty` (or its
subclass) are virtual: the attribute holds an indirection object and the
property value is accessed through its `~VirtualProperty.get()` and
`~VirtualProperty.set()` methods.

`describe()` returns the descriptor table of a class: an immutable, ordered
sequence of `PropertyDescriptor` instances (in declaration order) built from the
markers declared directly in the class (not inherited). The table is computed on
first access and cached for the lifetime of the class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, get_args, get_type_hints
from weakref import WeakKeyDictionary

from .serializor import DefaultSerializor, Serializor, runtime_type
from .types import UNDEFINED, Error, MissingMarkerError, NoSuchPropertyError

T = TypeVar('T')

#: Declared types that are not type-checked on direct value assignment.
PRIMITIVE_TYPES: tuple[type, ...] = (bool, int, float, complex)

class VirtualProperty(Generic[T], ABC):
    """Abstract base class for virtual property indirection objects.
    """
    @abstractmethod
    def get(self) -> T:
        """Returns property value.
        """
    @abstractmethod
    def set(self, value: T) -> None:
        """Sets property value.
        """

class Property:
    """Marker of configuration property, and data descriptor that stores its value
    in instance `__dict__`.

    Reading an unset property returns `None`. Assignment to the attribute is not
    validated, validation is done only by `.SerializationConfig` setter methods.

    Arguments:
        datatype: Declared property type. Defaults to class annotation of the property.
        serializor: `.Serializor` class. Defaults to `.DefaultSerializor`.
        validator: `.Validator` or `.ObjectUsingValidator` class.
    """
    def __init__(self, datatype: Any=UNDEFINED, *, serializor: type[Serializor] | None=None,
                 validator: type | None=None):
        #: Declared property type (`UNDEFINED` = use class annotation).
        self.datatype: Any = datatype
        #: Serializor class.
        self.serializor: type[Serializor] = DefaultSerializor if serializor is None else serializor
        #: Validator class.
        self.validator: type | None = validator
        #: Property name.
        self.name: str | None = None
    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.__dict__.get(self.name)
    def __set__(self, obj, value) -> None:
        obj.__dict__[self.name] = value
    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"

@dataclass(frozen=True)
class PropertyDescriptor:
    """Immutable metadata of one configuration property.
    """
    #: Property name.
    name: str
    #: Declared type.
    datatype: Any
    #: Serializor class.
    serializor: type[Serializor]
    #: Validator class (or `None`).
    validator: type | None
    #: True for virtual properties.
    is_virtual: bool
    @property
    def value_type(self) -> Any:
        """Type of property value. For virtual properties it's the type argument of
        `VirtualProperty` annotation (or `~typing.Any`), otherwise the declared type.
        """
        if self.is_virtual:
            args = get_args(self.datatype)
            return args[0] if args else Any
        return self.datatype
    @property
    def is_primitive(self) -> bool:
        """True if declared type is primitive (it's not type-checked).
        """
        return self.datatype in PRIMITIVE_TYPES
    def accepts(self, value: Any) -> bool:
        """Returns True if `value` is an instance of declared type.
        """
        return isinstance(value, runtime_type(self.datatype))

_descriptors: WeakKeyDictionary[type, tuple[PropertyDescriptor, ...]] = WeakKeyDictionary()

def _build_descriptors(cls: type) -> tuple[PropertyDescriptor, ...]:
    result = []
    hints = None
    for name, marker in vars(cls).items():
        if not isinstance(marker, Property):
            continue
        datatype = marker.datatype
        if datatype is UNDEFINED:
            if hints is None:
                try:
                    hints = get_type_hints(cls)
                except Exception as exc:
                    raise Error(f"Cannot resolve annotations of '{cls.__qualname__}', "
                                "pass property datatype to Property()", cls=cls) from exc
            datatype = hints.get(name, Any)
        origin = runtime_type(datatype)
        is_virtual = isinstance(origin, type) and issubclass(origin, VirtualProperty)
        result.append(PropertyDescriptor(name, datatype, marker.serializor, marker.validator,
                                         is_virtual))
    return tuple(result)

def describe(cls: type) -> tuple[PropertyDescriptor, ...]:
    """Returns descriptor table (ordered tuple of `PropertyDescriptor`) of a class.

    Raises:
        Error: When class annotations cannot be resolved.
    """
    if (result := _descriptors.get(cls)) is None:
        result = _build_descriptors(cls)
        _descriptors[cls] = result
    return result

def get_descriptor(obj: Any, name: str, *, ignore_case: bool=False) -> PropertyDescriptor:
    """Returns descriptor of property.

    Arguments:
        obj: Configuration object or class.
        name: Property name.
        ignore_case: When True, name is matched case-insensitively (exact match
                     takes precedence).

    Raises:
        MissingMarkerError: When `name` is an attribute that is not a property.
        NoSuchPropertyError: When `name` is not known.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    table = describe(cls)
    for desc in table:
        if desc.name == name:
            return desc
    if ignore_case:
        lname = name.lower()
        for desc in table:
            if desc.name.lower() == lname:
                return desc
    if name and hasattr(obj, name):
        raise MissingMarkerError(f"'{name}' is not a property of '{cls.__qualname__}'",
                                 property=name, config=cls)
    raise NoSuchPropertyError(f"'{cls.__qualname__}' has no property '{name}'",
                              property=name, config=cls)
