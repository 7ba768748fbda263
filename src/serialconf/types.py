# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/types.py
# DESCRIPTION:    Common types and exceptions
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

"""serialconf - Common types and exceptions

This module provides fundamental building blocks used across the `serialconf`
package:

- The base exception class (`Error`) and the property error taxonomy
  (`NoSuchPropertyError`, `MissingMarkerError`, `PropertyTypeError`,
  `ChangeDeniedError`, `IllegalPropertyValueError`).
- Sentinel objects (`Sentinel`, `UNDEFINED`).
- Base class for objects with distinct identities based on keys (`Distinct`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any

# Exceptions

class Error(Exception):
    """Exception intended as a base for all `serialconf` errors.

    Unlike the standard `Exception`, this class accepts arbitrary keyword
    arguments during initialization. These keyword arguments are stored as
    attributes on the exception instance.

    Important:
        Attribute lookup on this class never fails, as all attributes that are not actually
        set, have `None` value. The special attribute `__notes__` (used by `add_note`)
        is explicitly excluded from this behavior.

    Example::

        try:
            cfg.get_property('child.missing')
        except Error as e:
            if e.path is not None:
                ...
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args)
        for name, value in kwargs.items():
            setattr(self, name, value)
    def __getattr__(self, name) -> Any | None:
        if name == '__notes__':
            raise AttributeError
        return None

class NoSuchPropertyError(Error, LookupError):
    """Raised when a property path segment cannot be resolved to a declared property.

    Attributes set by the framework: `property` (the unresolved name) and
    `config` (class of the configuration object searched).
    """

class MissingMarkerError(NoSuchPropertyError):
    """Raised when a name resolves to a class member that is not marked as `.Property`.
    """

class PropertyTypeError(Error, TypeError):
    """Raised when a value is incompatible with the declared type of a property.

    This error is never swallowed by the framework, because silent type coercion
    would corrupt data.
    """

class ChangeDeniedError(Error):
    """Raised by a `.Validator` to deny a proposed property change.

    The public setters of `.SerializationConfig` convert this error into a `False`
    return value.
    """

class IllegalPropertyValueError(Error, ValueError):
    """Raised by a `.Serializor` when a value cannot be converted to the target type.
    """

# Sentinels

class _SentinelMeta(type):
    """Metaclass for Sentinel objects.

    - Sentinels cannot be instantiated nor subclassed after initial definition.
    - Provides `__repr__` and `__str__` based on the class name.
    """
    def __new__(metaclass, name, bases, namespace): # noqa: N804
        def __new__(cls, *args, **kwargs): # noqa: N807, ARG001
            raise TypeError(f'Cannot initialise or subclass sentinel {cls.__name__!r}')
        cls = super().__new__(metaclass, name, bases, namespace)
        if type(metaclass) is metaclass:
            cls_call = getattr(cls, '__call__', None) # noqa B004
            metaclass_call = getattr(metaclass, '__call__', None) # noqa B004
            if cls_call is not None and cls_call is metaclass_call:
                cls.__call__ = super().__call__
            cls.__new__ = __new__
        if not issubclass(cls, metaclass):
            raise TypeError(f'{metaclass.__name__!r} must also be derived from when provided as a metaclass')
        cls.__class__ = cls
        return cls
    def __call__(cls, name, bases=None, namespace=None, /, *, repr=None) -> type[Sentinel]: # noqa: A002
        if bases is not None:
            return cls.__new__(cls, name, bases, namespace)
        bases = (cls,)
        namespace = {}
        if repr is not None:
            def __repr__(cls): # noqa: ARG001, N807
                return repr
            namespace['__repr__'] =__repr__
        return cls.__new__(cls, name, bases, namespace)
    def __str__(cls):
        return cls.__name__
    def __repr__(cls):
        return cls.__name__
    @property
    def name(cls):
        return cls.__name__

class Sentinel(_SentinelMeta, metaclass=_SentinelMeta):
    """Base class for creating unique sentinel objects.

    Sentinels are used where `None` is a valid data value, for example as the
    "not specified" default of keyword arguments.

    Example::

        class NO_DATATYPE(Sentinel):
            "Datatype is taken from class annotation"

        NOT_SET = Sentinel("NOT_SET", repr="<not set>")
    """

class UNDEFINED(Sentinel):
    "Sentinel that denotes explicitly undefined value"

# Distinct objects

class Distinct(ABC):
    """Abstract base class for objects with distinct instances based on a key.

    Instances are considered equal (`==`) if their keys, returned by
    `get_key()`, are equal. The hash of an instance is derived from the
    hash of its key.

    .. important::

       If used with `@dataclass`, it must be defined with `eq=False`
       to prevent overriding the custom `__eq__` and `__hash__` methods.
    """
    @abstractmethod
    def get_key(self) -> Hashable:
        """Return the unique key identifying this instance.
        """
    def __hash(self) -> int:
        return hash(self.get_key())
    def __eq__(self, other) -> bool:
        if isinstance(other, Distinct):
            return self.get_key() == other.get_key()
        return False
    __hash__ = __hash
