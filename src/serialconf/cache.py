# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/cache.py
# DESCRIPTION:    Owner-scoped cache of strategy instances
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

"""serialconf - Owner-scoped cache of strategy instances

Serializors and validators may need a back-reference to the configuration
object that owns the property (e.g. to read sibling properties during
validation), so they cannot be process-wide singletons. `InstanceCache`
provides exactly one instance per (strategy class, owner) pair.

The instances are stored in a slot inside the owner object, not in a
mapping keyed by the owner, so a strategy that keeps a reference to its owner
does not keep the owner alive: the owner, its slot and the strategies form a
reference cycle that is released by the garbage collector together with the
owner.
"""

from __future__ import annotations

from inspect import signature
from typing import Any, TypeVar

from .logging import get_logger
from .types import Error

_T = TypeVar('_T')

def _accepts_owner(cls: type) -> bool:
    try:
        sig = signature(cls)
    except (TypeError, ValueError):
        return False
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True

class InstanceCache:
    """Cache of strategy instances scoped to owner objects.

    Arguments:
        name: Cache name. It's used to name the slot in owner objects, so caches
              with different names never share instances.
    """
    def __init__(self, name: str):
        #: Cache name.
        self.name: str = name
        self._slot: str = f'__{name}_cache__'
    def _get_slot(self, owner: Any) -> dict[type, Any]:
        try:
            storage = vars(owner)
        except TypeError as exc:
            raise Error(f"Object of type '{type(owner).__name__}' cannot own cached instances",
                        owner=owner) from exc
        return storage.setdefault(self._slot, {})
    def get_instance(self, cls: type[_T], owner: Any) -> _T:
        """Returns instance of `cls` owned by `owner`.

        The first call for a (`cls`, `owner`) pair creates the instance. When `cls`
        accepts one positional argument, the owner is passed to it, otherwise the
        instance is created without arguments.

        Raises:
            Error: When instance cannot be created.
        """
        slot = self._get_slot(owner)
        if (instance := slot.get(cls)) is None:
            try:
                instance = cls(owner) if _accepts_owner(cls) else cls()
            except Exception as exc:
                raise Error(f"Cannot create instance of '{cls.__qualname__}'",
                            cls=cls) from exc
            slot[cls] = instance
            get_logger(owner, 'cache').debug("%s instance '%s' created", self.name,
                                             cls.__qualname__)
        return instance
    def has_instance(self, cls: type, owner: Any) -> bool:
        """Returns True if instance of `cls` owned by `owner` was already created.
        """
        return cls in vars(owner).get(self._slot, {})
    def clear(self, owner: Any) -> None:
        """Removes all instances owned by `owner` from cache.
        """
        vars(owner).pop(self._slot, None)

#: Cache of `.Serializor` instances.
serializor_cache: InstanceCache = InstanceCache('serializor')
#: Cache of `.Validator` instances.
validator_cache: InstanceCache = InstanceCache('validator')
