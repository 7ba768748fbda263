# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/registration.py
# DESCRIPTION:    Registry of serializable classes
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

"""serialconf - Registry of serializable classes

External loaders reconstruct configuration objects from generic value maps by
class alias. This module keeps the alias -> class registry used for that
purpose, and provides the two helpers such loaders need:

- `serialize_object()` returns the object's generic map with the class alias
  stored under the `TYPE_KEY` key.
- `deserialize_object()` looks up the class by the alias stored in the map
  and constructs the object from the remaining values.

A class is registered under the alias defined by its `_serial_alias_` class
attribute, or under its fully qualified name.

Example::

    register_class(ServerConfig)
    data = serialize_object(ServerConfig())   # {'==': 'app.ServerConfig', 'host': ...}
    cfg = deserialize_object(data)            # ServerConfig instance
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .collections import Registry
from .logging import get_logger
from .types import Distinct, Error

#: Key of the generic value map that holds the class alias.
TYPE_KEY: str = '=='

@runtime_checkable
class ConfigurationSerializable(Protocol):
    """Protocol of objects that can be stored as generic value maps.

    Implementing classes must also accept the map returned by `serialize()` as
    the only argument of their constructor.
    """
    def serialize(self) -> dict[str, Any]:
        """Returns the generic value map of this object."""

@dataclass(eq=False)
class RegisteredClass(Distinct):
    """Class registry entry.

    Arguments:
        alias: Name under which the class is registered.
        cls: Registered class.
    """
    alias: str
    cls: type
    def get_key(self) -> str:
        """Returns the alias, used as key in the registry."""
        return self.alias

_classes: Registry = Registry()

def _log():
    return get_logger(__name__, 'registration')

def get_class_alias(cls: type) -> str:
    """Returns the default alias for a class: the `_serial_alias_` class attribute
    (not inherited), or the fully qualified class name.
    """
    return vars(cls).get('_serial_alias_') or f'{cls.__module__}.{cls.__qualname__}'

def register_class(cls: type, alias: str | None=None) -> None:
    """Registers a class for reconstruction by alias. Registering an alias again
    replaces the previous registration.

    Arguments:
        cls: Class to be registered.
        alias: Registration alias. Defaults to `get_class_alias(cls)`.

    Raises:
        TypeError: When `cls` is not a `ConfigurationSerializable` class.
    """
    if not (isinstance(cls, type) and issubclass(cls, ConfigurationSerializable)):
        raise TypeError(f"Class '{cls!r}' is not ConfigurationSerializable")
    entry = RegisteredClass(alias or get_class_alias(cls), cls)
    _classes.update(entry)
    _log().debug("Registered class '%s' as '%s'", cls.__qualname__, entry.alias)

def unregister_class(cls: type | str) -> None:
    """Unregisters a class. When a class is passed, all its aliases are removed.
    Unknown classes and aliases are ignored.
    """
    if isinstance(cls, str):
        entries = [_classes[cls]] if cls in _classes else []
    else:
        entries = list(_classes.filter(lambda item: item.cls is cls))
    for entry in entries:
        _classes.remove(entry)
        _log().debug("Unregistered class '%s' ('%s')", entry.cls.__qualname__, entry.alias)

def is_registered(cls: type | str) -> bool:
    """Returns True if class (or alias) is registered.
    """
    if isinstance(cls, str):
        return cls in _classes
    return _classes.find(lambda item: item.cls is cls) is not None

def get_class(alias: str) -> type | None:
    """Returns class registered under alias, or `None`.
    """
    entry: RegisteredClass | None = _classes.get(alias)
    return None if entry is None else entry.cls

def clear() -> None:
    """Removes all registrations.
    """
    _classes.clear()

def serialize_object(obj: ConfigurationSerializable) -> dict[str, Any]:
    """Returns generic value map of `obj` with its class alias under `TYPE_KEY`.

    Raises:
        Error: When class of `obj` is not registered.
    """
    entry: RegisteredClass | None = _classes.find(lambda item: item.cls is type(obj))
    if entry is None:
        raise Error(f"Class '{type(obj).__qualname__}' is not registered", cls=type(obj))
    result = {TYPE_KEY: entry.alias}
    result.update(obj.serialize())
    return result

def deserialize_object(values: Mapping[str, Any]) -> Any:
    """Constructs object from generic value map that carries class alias under `TYPE_KEY`.

    Raises:
        Error: When map does not specify class alias, or the alias is not registered.
    """
    if (alias := values.get(TYPE_KEY)) is None:
        raise Error(f"Value map does not specify class alias ('{TYPE_KEY}' key)")
    if (cls := get_class(alias)) is None:
        raise Error(f"Unknown class alias '{alias}'", alias=alias)
    return cls({k: v for k, v in values.items() if k != TYPE_KEY})
