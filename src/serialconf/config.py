# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/config.py
# DESCRIPTION:    Declarative serializable configuration objects
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

"""serialconf - Declarative serializable configuration objects

`SerializationConfig` is the base class for configuration objects that declare
once which of their attributes are properties, how each property is converted
to and from generic value maps (and strings), and how changes of each property
are validated.

Features:

*   Construction with defaults (`SerializationConfig.set_defaults`), optionally
    followed by deserialization from a generic value map.
*   Serialization into an ordered generic value map (`SerializationConfig.serialize`).
*   String-addressable properties with dotted paths into nested configurations
    (``'child.value'``) for reading and writing (`get_property`, `set_property`,
    `set_property_value`), with optional case-insensitive name matching.
*   Property name aliases (`register_alias`, ``get_aliases()`` supplier).
*   Pluggable serializors and validators per property, and a class-wide default
    validator.

Example::

    from serialconf.config import SerializationConfig
    from serialconf.property import Property
    from serialconf.types import ChangeDeniedError
    from serialconf.validator import Validator

    class PortValidator(Validator):
        def validate_change(self, name, new_value, old_value):
            if not 0 < new_value < 65536:
                raise ChangeDeniedError(f"Invalid port {new_value}")
            return new_value

    class ServerConfig(SerializationConfig):
        host: str = Property()
        port: int = Property(validator=PortValidator)
        def set_defaults(self):
            self.host = 'localhost'
            self.port = 8080
        @staticmethod
        def get_aliases():
            return {'hostname': 'host'}

    cfg = ServerConfig({'port': 9000})
    cfg.set_property('hostname', 'example.com')   # True
    cfg.set_property('port', '0')                 # False, denied by validator
    cfg.get_property('port')                      # '9000'
    cfg.serialize()                               # {'host': 'example.com', 'port': 9000}

Important:
    Writes into nested configurations are not atomic. When a path has more than one
    segment, the change is made in the nested configuration first, and only then the
    validator of the parent property is called, with the (already changed) nested
    configuration as both new and old value. The parent validator is a notification:
    its result, including `.ChangeDeniedError`, is ignored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from .alias import get_alias_map as _get_alias_map
from .alias import register_alias as _register_alias
from .alias import resolve_alias
from .cache import serializor_cache, validator_cache
from .logging import BraceMessage, ContextLoggerAdapter, get_logger
from .property import PropertyDescriptor, describe, get_descriptor
from .registration import ConfigurationSerializable, register_class, unregister_class
from .serializor import runtime_type
from .types import ChangeDeniedError, Error, NoSuchPropertyError, PropertyTypeError
from .validator import ObjectUsingValidator, Validator

def _split_path(path: str) -> tuple[str, str | None]:
    head, sep, tail = path.partition('.')
    return head, tail if sep else None

def _nested_config_types(cls: type) -> list[type]:
    result = []
    for desc in describe(cls):
        origin = runtime_type(desc.datatype)
        if isinstance(origin, type) and issubclass(origin, ConfigurationSerializable):
            result.append(origin)
    return result

class SerializationConfig(ABC):
    """Base class for declarative serializable configuration objects.

    Arguments:
        values: Generic value map to deserialize property values from. Properties
                that are not present in the map keep their default values.

    Descendants must:

    - declare properties as class attributes holding `.Property` markers,
    - implement `set_defaults()` that assigns default values to all properties,
    - accept the generic value map as the only (optional) constructor argument.

    A class-wide default validator (used for properties that do not specify one)
    is declared with ``validator`` class keyword::

        class AuditedConfig(SerializationConfig, validator=AuditValidator):
            ...

    The default validator applies only to the class that declares it.
    """
    _validate_all_with_: ClassVar[type | None] = None
    def __init_subclass__(cls, /, validator: type | None=None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._validate_all_with_ = validator
    def __init__(self, values: Mapping[str, Any] | None=None):
        self.set_defaults()
        if values is not None:
            self._load_values(values)
    def __repr__(self):
        return f"{self.__class__.__qualname__}({self.serialize()!r})"
    def _log(self) -> ContextLoggerAdapter:
        return get_logger(self, 'config')
    def _load_values(self, values: Mapping[str, Any]) -> None:
        for desc in describe(type(self)):
            if desc.is_virtual:
                continue
            try:
                serializor = serializor_cache.get_instance(desc.serializor, self)
                value = serializor.deserialize(values.get(desc.name), desc.datatype)
                if value is not None:
                    setattr(self, desc.name, value)
            except Exception: # noqa: BLE001
                self._log().debug(BraceMessage("Property '{0}' not deserialized", desc.name),
                                  exc_info=True)
    def _resolve(self, name: str, ignore_case: bool) -> PropertyDescriptor: # noqa: FBT001
        return get_descriptor(self, resolve_alias(type(self), name), ignore_case=ignore_case)
    def _get_value(self, desc: PropertyDescriptor) -> Any:
        value = getattr(self, desc.name)
        return value.get() if desc.is_virtual else value
    def _get_child(self, desc: PropertyDescriptor) -> SerializationConfig:
        child = getattr(self, desc.name)
        if not isinstance(child, SerializationConfig):
            raise NoSuchPropertyError(f"Property '{desc.name}' is not a configuration",
                                      property=desc.name, config=type(self))
        return child
    def _validate(self, desc: PropertyDescriptor, new_value: Any) -> Any:
        if (validator_cls := desc.validator or self._validate_all_with_) is None:
            return new_value
        validator = validator_cache.get_instance(validator_cls, self)
        old_value = self._get_value(desc)
        if isinstance(validator, ObjectUsingValidator):
            return validator.validate_change(desc.name, new_value, old_value, self)
        if isinstance(validator, Validator):
            return validator.validate_change(desc.name, new_value, old_value)
        raise Error(f"Illegal validator '{validator_cls.__qualname__}'", validator=validator_cls)
    def _commit(self, desc: PropertyDescriptor, value: Any) -> bool:
        try:
            value = self._validate(desc, value)
        except ChangeDeniedError:
            self._log().debug(BraceMessage("Change of property '{0}' denied", desc.name))
            return False
        if desc.is_virtual:
            getattr(self, desc.name).set(value)
        else:
            setattr(self, desc.name, value)
        return True
    def _set_nested(self, desc: PropertyDescriptor,
                    setter: Callable[[SerializationConfig], bool]) -> bool:
        child = self._get_child(desc)
        error = None
        try:
            result = setter(child)
        except Exception as exc: # noqa: BLE001
            error, result = exc, False
        # The parent validator is only notified, the nested change is already done.
        try:
            self._validate(desc, child)
        except Exception: # noqa: BLE001
            self._log().debug(BraceMessage("Validator of '{0}' ignored", desc.name),
                              exc_info=True)
        if error is not None:
            raise error
        return result
    def _set_value(self, desc: PropertyDescriptor, value: Any) -> bool:
        if not (desc.is_virtual or desc.is_primitive or desc.accepts(value)):
            if value is None:
                return False
            raise PropertyTypeError(f"'{type(value).__name__}' cannot be assigned to property "
                                    f"'{desc.name}' of type '{desc.datatype!r}'",
                                    property=desc.name, value=value)
        return self._commit(desc, value)
    def _set_str(self, desc: PropertyDescriptor, value: str) -> bool:
        serializor = serializor_cache.get_instance(desc.serializor, self)
        try:
            new_value = serializor.deserialize_from_str(value, desc.value_type)
        except Exception: # noqa: BLE001
            self._log().debug(BraceMessage("Illegal value for property '{0}'", desc.name),
                              exc_info=True)
            return False
        if not (desc.is_virtual or desc.is_primitive or desc.accepts(new_value)):
            return False
        return self._commit(desc, new_value)
    @abstractmethod
    def set_defaults(self) -> None:
        """Sets all properties to their default values.

        Important:
            All properties must be initialized here, as it's called by constructor before
            values are deserialized from generic value map.
        """
    @classmethod
    def from_map(cls, values: Mapping[str, Any]) -> SerializationConfig:
        """Returns new instance deserialized from generic value map.
        """
        return cls(values)
    @classmethod
    def register_all(cls) -> None:
        """Registers this class, and all configuration classes used as declared
        types of its properties, for reconstruction by `.deserialize_object`.
        """
        register_class(cls)
        for subclass in _nested_config_types(cls):
            register_class(subclass)
    @classmethod
    def unregister_all(cls) -> None:
        """Unregisters classes registered by `register_all`.
        """
        unregister_class(cls)
        for subclass in _nested_config_types(cls):
            unregister_class(subclass)
    def register_alias(self, alias: str, name: str) -> None:
        """Registers property name alias for class of this configuration.

        Arguments:
            alias: The alias.
            name: Property name.
        """
        _register_alias(type(self), alias, name)
    def get_alias_map(self) -> dict[str, str]:
        """Returns alias table for class of this configuration.
        """
        return _get_alias_map(type(self))
    def serialize(self) -> dict[str, Any]:
        """Returns generic value map with values of all non-virtual properties, in
        declaration order. Properties that cannot be serialized are omitted.
        """
        result = {}
        for desc in describe(type(self)):
            if desc.is_virtual:
                continue
            try:
                serializor = serializor_cache.get_instance(desc.serializor, self)
                result[desc.name] = serializor.serialize(getattr(self, desc.name))
            except Exception: # noqa: BLE001
                self._log().debug(BraceMessage("Property '{0}' not serialized", desc.name),
                                  exc_info=True)
        return result
    def set_property_value(self, path: str, value: Any, *, ignore_case: bool=False) -> bool:
        """Sets property value.

        Arguments:
            path: Property name, or dotted path to property of nested configuration
                  (e.g. ``'child.value'``). Aliases are resolved in each segment.
            value: New property value.
            ignore_case: When True, property names are matched case-insensitively.

        Returns:
            True on success, False if property was not found, value was denied by
            validator, or the operation failed.

        Raises:
            PropertyTypeError: When value is not an instance of property declared type.
        """
        try:
            name, rest = _split_path(path)
            desc = self._resolve(name, ignore_case)
            if rest is None:
                return self._set_value(desc, value)
            return self._set_nested(desc, lambda child: child.set_property_value(rest, value,
                                                                                 ignore_case=ignore_case))
        except PropertyTypeError:
            raise
        except Exception: # noqa: BLE001
            self._log().debug(BraceMessage("Property '{0}' not set", path), exc_info=True)
        return False
    def set_property(self, path: str, value: str, *, ignore_case: bool=False) -> bool:
        """Sets property value from string.

        The string is converted by property serializor, which must support conversion
        from string.

        Arguments:
            path: Property name, or dotted path to property of nested configuration
                  (e.g. ``'child.value'``). Aliases are resolved in each segment.
            value: New property value as string.
            ignore_case: When True, property names are matched case-insensitively.

        Returns:
            True on success, False if the operation failed for any reason.
        """
        try:
            name, rest = _split_path(path)
            desc = self._resolve(name, ignore_case)
            if rest is None:
                return self._set_str(desc, value)
            return self._set_nested(desc, lambda child: child.set_property(rest, value,
                                                                           ignore_case=ignore_case))
        except Exception: # noqa: BLE001
            self._log().debug(BraceMessage("Property '{0}' not set", path), exc_info=True)
        return False
    def get_property(self, path: str, *, ignore_case: bool=False) -> str:
        """Returns property value as string.

        Arguments:
            path: Property name, or dotted path to property of nested configuration
                  (e.g. ``'child.value'``). Aliases are resolved in each segment.
            ignore_case: When True, property names are matched case-insensitively.

        Raises:
            NoSuchPropertyError: When any path segment is not a property.
            Error: When property value cannot be converted to string.
        """
        name, rest = _split_path(path)
        desc = self._resolve(name, ignore_case)
        if rest is not None:
            return self._get_child(desc).get_property(rest, ignore_case=ignore_case)
        try:
            serializor = serializor_cache.get_instance(desc.serializor, self)
            return serializor.to_str(self._get_value(desc))
        except Exception as exc:
            raise Error(f"Cannot get value of property '{desc.name}'", property=desc.name,
                        config=type(self)) from exc
    def get_property_unchecked(self, path: str, *, ignore_case: bool=False) -> str:
        """Returns property value as string. Same as `get_property`, but a missing
        property is treated as a programming error.

        Raises:
            RuntimeError: When any path segment is not a property.
        """
        try:
            return self.get_property(path, ignore_case=ignore_case)
        except NoSuchPropertyError as exc:
            raise RuntimeError(str(exc)) from exc
    @property
    def log_context(self) -> str:
        """Context information added to log records of this configuration.
        """
        return self.__class__.__qualname__
