# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/strconv.py
# DESCRIPTION:    Data conversion from/to string
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

"""serialconf - Data conversion from/to string

This module provides the registry of string convertors used when property
values are read or written as strings (`.SerializationConfig.get_property`
and `.SerializationConfig.set_property`). A convertor is registered for a
type, and is also used for all subclasses of that type that do not have
their own convertor (lookup follows the MRO).

Example::

    from datetime import date
    from serialconf.strconv import register_convertor, convert_to_str, convert_from_str

    register_convertor(date, to_str=lambda v: v.isoformat(),
                       from_str=lambda cls, v: cls.fromisoformat(v))

    convert_to_str(date(2026, 10, 18))      # '2026-10-18'
    convert_from_str(date, '2026-10-18')    # date(2026, 10, 18)
    convert_from_str(bool, 'yes')           # True
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from enum import Enum, IntEnum, IntFlag
from pathlib import Path
from typing import Any, TypeAlias
from uuid import UUID

from .collections import Registry
from .types import Distinct

#: Function that converts typed value to its string representation.
TConvertToStr: TypeAlias = Callable[[Any], str]
#: Function that converts string representation of typed value to typed value.
TConvertFromStr: TypeAlias = Callable[[type, str], Any]

@dataclass(eq=False)
class Convertor(Distinct):
    """Data convertor registry entry.

    Arguments:
        cls: The data type (class) this convertor handles.
        to_str: The function converting an instance of `cls` to a string.
        from_str: The function converting a string back to an instance of `cls`.
    """
    #: The data type (class) this convertor handles.
    cls: type
    #: The function converting an instance of `cls` to a string.
    to_str: TConvertToStr
    #: The function converting a string back to an instance of `cls`.
    from_str: TConvertFromStr
    def get_key(self) -> Hashable:
        """Returns instance key (the class itself)."""
        return self.cls
    @property
    def name(self) -> str:
        """Simple type name (e.g., 'int', 'Decimal')."""
        return self.cls.__name__
    @property
    def full_name(self) -> str:
        """Type name including source module (e.g., 'decimal.Decimal')."""
        return f'{self.cls.__module__}.{self.cls.__name__}'

_convertors: Registry = Registry()
_classes: dict[str, type] = {}

#: Valid string literals for True value.
TRUE_STR: list[str] = ['yes', 'true', 'on', 'y', '1']
#: Valid string literals for False value.
FALSE_STR: list[str] = ['no', 'false', 'off', 'n', '0']

def any2str(value: Any) -> str:
    """Default `to_str` convertor, uses `str(value)`.
    """
    return str(value)

def str2any(cls: type, value: str) -> Any:
    """Default `from_str` convertor, uses `cls(value)`.
    """
    return cls(value)

def register_convertor(cls: type, *, to_str: TConvertToStr=any2str,
                       from_str: TConvertFromStr=str2any) -> None:
    """Registers convertor function(s) for a specific data type.

    Arguments:
        cls:      Class to register convertor for.
        to_str:   Function that converts an instance of `cls` to `str`.
        from_str: Function that converts `str` to value of `cls` data type.

    Raises:
        ValueError: When convertor for `cls` is already registered.
    """
    _convertors.store(Convertor(cls, to_str, from_str))

def register_class(cls: type) -> None:
    """Registers a class name for lookup by simple name (with MRO search).

    Raises:
        TypeError: When the simple class name is already registered.
    """
    if cls.__name__ in _classes:
        raise TypeError(f"Class '{cls.__name__}' already registered as '{_classes[cls.__name__]!r}'")
    _classes[cls.__name__] = cls

def _get_convertor(cls: type | str) -> Convertor | None:
    if isinstance(cls, str):
        cls = _classes.get(cls, cls)
    if isinstance(cls, str):
        conv = _convertors.find(f"item.{'full_name' if '.' in cls else 'name'} == '{cls}'")
    elif (conv := _convertors.get(cls)) is None:
        for base in cls.__mro__:
            conv = _convertors.get(base)
            if conv is not None:
                break
    return conv

def has_convertor(cls: type | str) -> bool:
    """Returns True if a convertor is registered for the class or its bases.

    Arguments:
        cls: Type object or type name (simple or including module name).
    """
    return _get_convertor(cls) is not None

def update_convertor(cls: type | str, *,
                     to_str: TConvertToStr | None=None,
                     from_str: TConvertFromStr | None=None) -> None:
    """Update the `to_str` and/or `from_str` functions for an existing convertor.

    Raises:
        TypeError: If the data type (or its name) has no registered convertor.
    """
    conv: Convertor = get_convertor(cls)
    if to_str:
        conv.to_str = to_str
    if from_str:
        conv.from_str = from_str

def convert_to_str(value: Any) -> str:
    """Converts a value to its string representation using its registered convertor.

    Raises:
        TypeError: If no convertor is found for the value's class or its bases.
    """
    return get_convertor(value.__class__).to_str(value)

def convert_from_str(cls: type | str, value: str) -> Any:
    """Converts a string representation back to a typed value using a registered convertor.

    Raises:
        TypeError: If no convertor is found for `cls` or its bases.
        ValueError: When the string `value` is not valid for the target type.
    """
    return get_convertor(cls).from_str(cls, value)

def get_convertor(cls: type | str) -> Convertor:
    """Returns the Convertor object registered for a data type or its bases.

    Raises:
        TypeError: If no convertor is found for `cls` or any of its base classes.
    """
    if (conv := _get_convertor(cls)) is None:
        raise TypeError(f"Type '{cls.__name__ if isinstance(cls, type) else cls}' has no Convertor")
    return conv

def _register() -> None:
    """Internal function for registration of builtin converters."""

    def bool2str(value: bool) -> str: # noqa: FBT001
        return TRUE_STR[1] if value else FALSE_STR[1]
    def str2bool(type_: type, value: str) -> bool: # noqa: ARG001
        if (v := value.strip().lower()) in TRUE_STR:
            return True
        if v not in FALSE_STR:
            raise ValueError(f"'{value}' is not a valid bool string constant")
        return False
    def str2decimal(type_: type, value: str) -> Decimal:
        try:
            return type_(value)
        except DecimalException as exc:
            raise ValueError(f"could not convert string to {type_.__name__}: '{value}'") from exc
    def enum2str(value: Enum) -> str:
        return value.name
    def str2enum(cls: type, value: str) -> Enum:
        members_lower = {k.lower(): v for k, v in cls.__members__.items()}
        if (member := members_lower.get(value.strip().lower())) is None:
            raise ValueError(f"'{value}' is not a valid member of enum {cls.__name__}")
        return member
    def str2flag(cls: type, value: str) -> Enum:
        result = cls(0)
        members_lower = {k.lower(): v for k, v in cls.__members__.items()}
        for item in (x.strip() for x in value.lower().split('|')):
            if item not in members_lower:
                raise ValueError(f"'{item}' is not a valid member of flag {cls.__name__}")
            result |= members_lower[item]
        return result

    register_convertor(str)
    register_convertor(int)
    register_convertor(float)
    register_convertor(complex)
    register_convertor(Decimal, from_str=str2decimal)
    register_convertor(UUID)
    register_convertor(Path)
    register_convertor(bool, to_str=bool2str, from_str=str2bool)
    register_convertor(Enum, to_str=enum2str, from_str=str2enum)
    # IntEnum and IntFlag must be registered because 'int' is before Enum in MRO
    register_convertor(IntEnum, to_str=enum2str, from_str=str2enum)
    register_convertor(IntFlag, to_str=enum2str, from_str=str2flag)

_register()
del _register
