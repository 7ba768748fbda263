# SPDX-FileCopyrightText: 2026-present The serialconf Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: serialconf
# FILE:           serialconf/logging.py
# DESCRIPTION:    Context-based logging
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

"""serialconf - Context-based logging

This module provides context-based logging built on top of the standard `logging`
module. Framework components (configuration objects, strategy caches, the class
registry) obtain their loggers through `get_logger()`, which:

1. Names the underlying `logging.Logger` as `<root>.<topic>` (root defaults to
   ``serialconf``), so applications can tune framework output per topic.
2. Wraps the logger in `ContextLoggerAdapter`, which adds `agent`, `topic` and
   `context` fields into `logging.LogRecord`.

`BraceMessage` defers message formatting until the record is actually emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum
from typing import Any

class LogLevel(IntEnum):
    """Mirrors standard `logging` levels for convenience and type hinting.
    """
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    FATAL = CRITICAL
    WARN = WARNING

class BraceMessage:
    """Lazy logging message wrapper using brace (`str.format`) style formatting.

    Example::

        logger.debug(BraceMessage("Property '{0}' of {1} not deserialized", name, cls))
    """
    def __init__(self, fmt: str, /, *args, **kwargs):
        self.fmt: str = fmt
        self.args: tuple[Any, ...] = args
        self.kwargs: dict[str, Any] = kwargs
    def __str__(self) -> str:
        return self.fmt.format(*self.args, **self.kwargs)

class ContextFilter(logging.Filter):
    """Logging filter ensuring context fields exist on `LogRecord` instances.

    Adds `topic`, `agent` and `context` attributes with `None` value to records
    that were not created through `ContextLoggerAdapter`, so formatters that use
    these fields do not fail on records from foreign loggers.

    Example::

        handler = logging.StreamHandler()
        handler.addFilter(ContextFilter())
        handler.setFormatter(logging.Formatter('%(agent)s [%(context)s] %(message)s'))
    """
    def filter(self, record) -> bool:
        for attr in ('topic', 'agent', 'context'):
            if not hasattr(record, attr):
                setattr(record, attr, None)
        return True

class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter injecting context (`topic`, `agent`, `context`) info.

    The `context` field is taken from the `log_context` attribute of the agent
    object at the time of each logging call (or `None`).

    Parameters:
        logger: The standard `logging.Logger` instance to wrap.
        topic: Context Topic name (or None).
        agent: The original agent object or string passed to `get_logger`.
        agent_name: The resolved string name for the agent.
    """
    def __init__(self, logger, topic: str | None, agent: Any, agent_name: str):
        self.agent = agent
        super().__init__(logger, {'topic': topic, 'agent': agent_name})
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        """Merges context fields with `extra` passed to the logging call (which takes
        precedence).
        """
        extra = dict(self.extra, context=getattr(self.agent, 'log_context', None))
        kwargs['extra'] = dict(extra, **kwargs['extra']) if 'extra' in kwargs else extra
        return msg, kwargs

class LoggingManager:
    """Logging manager.
    """
    def __init__(self):
        self._topic_map: dict[str, str] = {}
        self._agent_map: dict[str, str] = {}
        self.__root: str = 'serialconf'
        self._logger_factory: Callable = logging.getLogger
    def get_logger_factory(self) -> Callable:
        """Return a callable which is used to create a Logger.
        """
        return self._logger_factory
    def set_logger_factory(self, factory) -> None:
        """Set a callable which is used to create a Logger.

        The factory has the following signature: `factory(name, *args, **kwargs)`
        """
        self._logger_factory = factory
    def reset(self) -> None:
        """Resets manager to "factory defaults": no mappings, ``serialconf`` root and
        `logging.getLogger` factory.
        """
        self._topic_map.clear()
        self._agent_map.clear()
        self.__root = 'serialconf'
        self._logger_factory = logging.getLogger
    @property
    def root(self) -> str:
        """Name of the logger that is parent to all topic loggers. Empty string means
        that topic loggers are top-level loggers.
        """
        return self.__root
    @root.setter
    def root(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Logger root name must be a string")
        if value and not all(value.split('.')):
            raise ValueError(f"Invalid logger root name '{value}'")
        self.__root = value
    def _get_logger_name(self, topic: str | None) -> str:
        return '.'.join(x for x in (self.__root, topic) if x)
    def set_topic_mapping(self, topic: str, new_topic: str | None) -> None:
        """Sets or removes (when `new_topic` is `None` or empty) the mapping of a topic
        name to another name.
        """
        if new_topic:
            self._topic_map[topic] = str(new_topic)
        else:
            self._topic_map.pop(topic, None)
    def get_topic_mapping(self, topic: str) -> str | None:
        """Returns current name mapping for topic, or `None`.
        """
        return self._topic_map.get(topic)
    def get_agent_name(self, agent: Any) -> str:
        """Determine the string name for a given agent.

        1. If `agent` is a string, it's used directly.
        2. Objects use `agent._agent_name_` if defined, otherwise ``module.ClassQualname``.
        3. Agent name mapping defined via `set_agent_mapping` is applied.
        """
        agent_name: Any = agent
        if not isinstance(agent, str):
            if not (agent_name := getattr(agent, '_agent_name_', None)):
                agent_name = f'{agent.__class__.__module__}.{agent.__class__.__qualname__}'
        return str(self._agent_map.get(agent_name, agent_name))
    def set_agent_mapping(self, agent: str, new_agent: str | None) -> None:
        """Sets or removes (when `new_agent` is `None` or empty) the mapping of an agent
        name to another name.
        """
        if new_agent:
            self._agent_map[agent] = str(new_agent)
        else:
            self._agent_map.pop(agent, None)
    def get_agent_mapping(self, agent: str) -> str | None:
        """Returns current name mapping for agent, or `None`.
        """
        return self._agent_map.get(agent)
    def get_logger(self, agent: Any, topic: str | None=None) -> ContextLoggerAdapter:
        """Get a `ContextLoggerAdapter` for the specified agent and topic.

        Arguments:
            agent: The agent identifier (object or string).
            topic: Optional topic of the logging stream (e.g. 'config', 'cache').
        """
        agent_name = self.get_agent_name(agent)
        topic = self._topic_map.get(topic, topic)
        logger = self._logger_factory(self._get_logger_name(topic))
        return ContextLoggerAdapter(logger, topic, agent, agent_name)

#: Context logging manager.
logging_manager: LoggingManager = LoggingManager()
#: Shortcut to global `.LoggingManager.get_logger` function.
get_logger = logging_manager.get_logger
#: Shortcut to global `.LoggingManager.get_agent_name` function.
get_agent_name = logging_manager.get_agent_name
#: Shortcut to global `.LoggingManager.set_agent_mapping` function.
set_agent_mapping = logging_manager.set_agent_mapping
