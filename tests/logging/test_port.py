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
"""Tests for LoggingPort protocol."""

from typing import Any

from httphelpers.core.config import Config
from httphelpers.logging.port import LoggingPort


class RecordingLogging:
    def __init__(self) -> None:
        self.levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        self.levels.update(config.get_section("httphelpers.logging.level"))

    def get_logger(self, name: str) -> Any:
        return name

    def set_level(self, name: str, level: str) -> None:
        self.levels[name] = level


class TestLoggingPortProtocol:
    def test_conforming_class_is_instance(self):
        assert isinstance(RecordingLogging(), LoggingPort)

    def test_non_conforming_class_is_not_instance(self):
        class GetLoggerOnly:
            def get_logger(self, name: str) -> Any:
                return name

        assert not isinstance(GetLoggerOnly(), LoggingPort)

    def test_port_usable_through_protocol(self):
        port: LoggingPort = RecordingLogging()
        port.configure(Config({"httphelpers": {"logging": {"level": {"httphelpers.uploads": "DEBUG"}}}}))
        port.set_level("httphelpers.downloads", "WARNING")
        assert port.levels == {"httphelpers.uploads": "DEBUG", "httphelpers.downloads": "WARNING"}
