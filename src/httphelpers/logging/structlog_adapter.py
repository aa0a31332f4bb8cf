# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from starlette.requests import Request

from httphelpers.config.properties.logging import LoggingProperties
from httphelpers.core.config import Config

_FORMATS = ("console", "json")
_STREAMS = ("stdout", "stderr")


class StructlogAdapter:
    """Default logging adapter backed by structlog.

    The helpers log through ``structlog.get_logger(__name__)``; configuring
    this adapter routes those events through stdlib logging with either a
    console or a JSON renderer. Request details bound with
    :meth:`bind_request` are merged into every event logged while handling
    that request.

    Usage::

        adapter = StructlogAdapter()
        adapter.configure(Config.from_file("httphelpers.yaml"))
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._module_levels: dict[str, str] = {}
        self._properties = LoggingProperties()

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    def configure(self, config: Config) -> None:
        """Configure structlog from the httphelpers.logging section of config.

        Raises:
            ValueError: If the format or stream is not recognised.
        """
        level_section = dict(config.get_section("httphelpers.logging.level"))
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}

        properties = config.bind(LoggingProperties)
        properties.format = properties.format.lower()
        if properties.format not in _FORMATS:
            raise ValueError(f"Unknown log format '{properties.format}', expected one of {', '.join(_FORMATS)}")
        if properties.stream not in _STREAMS:
            raise ValueError(f"Unknown log stream '{properties.stream}', expected one of {', '.join(_STREAMS)}")
        self._properties = properties

        structlog.configure(
            processors=self._processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=getattr(sys, properties.stream),
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )

        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    @staticmethod
    def bind_request(request: Request) -> None:
        """Attach the request method and path to events logged in this context."""
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)

    @staticmethod
    def clear_request() -> None:
        structlog.contextvars.clear_contextvars()

    def _processors(self) -> list[structlog.types.Processor]:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]
        if self._properties.timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.extend([
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ])

        if self._properties.format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())
        return processors
