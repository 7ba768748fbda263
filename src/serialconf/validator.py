# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/validator.py
# DESCRIPTION:    Property change validators
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

"""serialconf - Property change validators

A validator inspects a proposed change of property value, and either:

- returns the value that should be stored (the proposed one, or a substitute),
- returns the old value (the change silently becomes a no-op), or
- raises `.ChangeDeniedError` (the change is not made and the setter returns `False`).

Validators are instantiated per owning configuration object by the
`.validator_cache`. A validator class may accept the owning object as the only
constructor argument. Validators that need the owning object on every call
should derive from `ObjectUsingValidator` instead.

Example::

    class PortValidator(Validator):
        def validate_change(self, name, new_value, old_value):
            if not 0 < new_value < 65536:
                raise ChangeDeniedError(f"Invalid port {new_value}")
            return new_value
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

class Validator(ABC):
    """Abstract base class for property change validators.
    """
    @abstractmethod
    def validate_change(self, name: str, new_value: Any, old_value: Any) -> Any:
        """Validates change of property value.

        Arguments:
            name: Property name.
            new_value: Proposed new value.
            old_value: Current value.

        Returns:
            Value that should be stored.

        Raises:
            ChangeDeniedError: When change is not allowed.
        """

class ObjectUsingValidator(ABC):
    """Abstract base class for validators that receive the owning configuration
    object on each call.
    """
    @abstractmethod
    def validate_change(self, name: str, new_value: Any, old_value: Any, obj: Any) -> Any:
        """Validates change of property value.

        Arguments:
            name: Property name.
            new_value: Proposed new value.
            old_value: Current value.
            obj: Configuration object that owns the property.

        Returns:
            Value that should be stored.

        Raises:
            ChangeDeniedError: When change is not allowed.
        """
