# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/alias.py
# DESCRIPTION:    Property name aliases
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

"""serialconf - Property name aliases

Each configuration class has its own table of aliases (alternative property
names). The table is created on first use: when the class itself (not its
base) defines a static or class method `get_aliases()` returning a mapping
of alias to property name, the table starts with its content, otherwise it
starts empty. Aliases can be added later with `register_alias()`.

Tables are kept in a `~weakref.WeakKeyDictionary`, so they never keep their
class alive.
"""

from __future__ import annotations

from collections.abc import Mapping
from weakref import WeakKeyDictionary

from .logging import get_logger

_aliases: WeakKeyDictionary[type, dict[str, str]] = WeakKeyDictionary()

def _get_default_aliases(cls: type) -> dict[str, str]:
    if 'get_aliases' not in vars(cls):
        return {}
    try:
        result = cls.get_aliases()
    except Exception: # noqa: BLE001
        get_logger(__name__, 'alias').debug("Alias supplier of '%s' failed", cls.__qualname__,
                                           exc_info=True)
        return {}
    if not isinstance(result, Mapping) or \
       not all(isinstance(k, str) and isinstance(v, str) for k, v in result.items()):
        get_logger(__name__, 'alias').debug("Alias supplier of '%s' returned '%s'",
                                           cls.__qualname__, type(result).__name__)
        return {}
    return dict(result)

def get_alias_map(cls: type) -> dict[str, str]:
    """Returns the (live) alias table of a class.

    Arguments:
        cls: Configuration class.
    """
    if (result := _aliases.get(cls)) is None:
        result = _get_default_aliases(cls)
        _aliases[cls] = result
    return result

def register_alias(cls: type, alias: str, name: str) -> None:
    """Registers (or replaces) an alias of property.

    Arguments:
        cls: Configuration class.
        alias: The alias.
        name: Property name.
    """
    get_alias_map(cls)[alias] = name

def resolve_alias(cls: type, name: str) -> str:
    """Returns property name for alias, or `name` when it's not a known alias
    for `cls` (aliases of base classes are not considered).
    """
    return get_alias_map(cls).get(name, name)
