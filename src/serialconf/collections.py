# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/collections.py
# DESCRIPTION:    Registry collection
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

"""serialconf - Registry collection

This module provides `Registry`, a mapping container for `.Distinct` objects
used by the string convertor registry (`.strconv`) and the class registry
(`.registration`). Items are stored under the key returned by their
`~.Distinct.get_key()` method, and can be searched with `filter` and `find`
using a lambda or a Python expression string referencing the item as `item`.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterator, Mapping, Sequence
from typing import Any, TypeAlias, TypeVar, cast

from .types import Distinct

_T = TypeVar("_T")

def make_lambda(expr: str, params: str='item', context: dict[str, Any] | None=None) -> Callable[..., Any]:
    """Makes lambda function from expression.

    Arguments:
        expr: Python expression as string.
        params: Comma-separated list of names that should be used as lambda parameters
        context: Dictionary passed as `context` to `eval`.

    Note:
        Uses `eval`. The `expr` string must come from a trusted source.
    """
    return eval(f"lambda {params}:{expr}", context) if context \
           else eval(f"lambda {params}:{expr}") # noqa: S307

#: Filter expression
FilterExpr: TypeAlias = str | Callable[[Distinct], bool]

class Registry(Mapping[Any, Distinct]):
    """Mapping container for `.Distinct` objects.

    Any method that expects a `key` also accepts a `.Distinct` instance.

    - `R.store(item)` registers an item and fails when the key is already taken.
    - `R[key] = item` and `R.update(items)` register or replace items.
    - `key in R`, `R.get(key)` and `R[key]` look items up.
    - `R.remove(item)` and `del R[key]` delete items.

    Arguments:
        data: Either a `.Distinct` instance, or sequence or mapping of `.Distinct`
              instances.
    """
    def __init__(self, data: Mapping[Any, Distinct] | Sequence[Distinct] | Registry=None):
        self._reg: dict[Any, Distinct] = {}
        if data:
            self.update(data)
    def __len__(self):
        return len(self._reg)
    def __getitem__(self, key: Any) -> Distinct:
        return self._reg[key.get_key() if isinstance(key, Distinct) else key]
    def __setitem__(self, key: Any, value: Distinct) -> None:
        assert isinstance(value, Distinct) # noqa: S101
        self._reg[key.get_key() if isinstance(key, Distinct) else key] = value
    def __delitem__(self, key: Any) -> None:
        del self._reg[key.get_key() if isinstance(key, Distinct) else key]
    def __iter__(self) -> Iterator[Distinct]:
        return iter(self._reg.values())
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}([{', '.join(repr(x) for x in self)}])"
    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Distinct):
            item = item.get_key()
        return item in self._reg
    def filter(self, expr: FilterExpr) -> Generator[Distinct, None, None]:
        """Returns generator that yields items for which `expr` is evaluated as True.

        Arguments:
            expr: Bool expression, a callable accepting one parameter and returning bool or
                  bool expression as string referencing registry item as `item`.

        Example:
            .. code-block:: python

               R.filter(lambda x: x.name.startswith("Sample"))
               R.filter('item.name.startswith("Sample")')
        """
        fce = expr if callable(expr) else make_lambda(expr)
        return (item for item in self if fce(item))
    def find(self, expr: FilterExpr, default: _T=None) -> Distinct | _T:
        """Returns first item for which `expr` is evaluated as True, or default.
        """
        return next(self.filter(expr), default)
    def clear(self) -> None:
        """Remove all items from registry.
        """
        self._reg.clear()
    def get(self, key: Any, default: _T=None) -> Distinct | _T:
        """ D.get(key[,d]) -> D[key] if key in D else d. d defaults to None.
        """
        return self._reg.get(key.get_key() if isinstance(key, Distinct) else key, default)
    def store(self, item: Distinct) -> Distinct:
        """Register an item.

        Raises:
            ValueError: When item is already registered.
        """
        assert isinstance(item, Distinct), f"Item is not of type '{Distinct.__name__}'" # noqa: S101
        key = item.get_key()
        if key in self._reg:
            raise ValueError(f"Item already registered, key: '{key}'")
        self._reg[key] = item
        return item
    def remove(self, item: Distinct) -> None:
        """Removes item from registry (same as: del R[item]).
        """
        del self._reg[item.get_key()]
    def update(self, _from: Distinct | Mapping[Any, Distinct] | Sequence[Distinct]) -> None:
        """Update items in the registry (items with the same key are replaced).

        Arguments:
            _from: Either a `.Distinct` instance, or sequence or mapping of `.Distinct`
                   instances.
        """
        if isinstance(_from, Distinct):
            self[_from] = _from
        else:
            for item in cast(Mapping, _from).values() if hasattr(_from, 'values') else _from:
                self[item] = item
