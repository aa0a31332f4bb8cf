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
"""LoggingPort — how an application wires up the helpers' log output."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from httphelpers.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Logging backend for the helper modules.

    The helpers emit events on loggers named after their modules
    (``httphelpers.uploads.storage``, ``httphelpers.downloads``, ...); an
    implementation decides how those events are rendered and filtered.
    """

    def configure(self, config: Config) -> None:
        """Apply the ``httphelpers.logging`` section of *config*."""
        ...

    def get_logger(self, name: str) -> Any:
        """Return a structured logger bound to *name*."""
        ...

    def set_level(self, name: str, level: str) -> None:
        """Change the level of one module's logger at runtime."""
        ...
