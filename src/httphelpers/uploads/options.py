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
"""Upload options: immutable snapshots built from defaults plus overrides."""

from __future__ import annotations

import dataclasses
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from httphelpers.config.properties.uploads import UploadProperties
from httphelpers.core.config import Config

DEFAULT_MAX_FILE_SIZE = 10 << 20
DEFAULT_RANDOM_STRING_SIZE = 10


@dataclass(frozen=True)
class UploadOptions:
    """Settings for a single upload call.

    Attributes:
        max_file_size: Largest accepted file, in bytes. Also bounds the size
            of each non-file part while the multipart body is parsed.
        random_string_size: Length of the ``randomString`` template variable.
        random_source: Generator for ``randomString``. ``None`` seeds a new
            generator from the clock on every call.
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    random_string_size: int = DEFAULT_RANDOM_STRING_SIZE
    random_source: random.Random | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_properties(cls, properties: UploadProperties) -> UploadOptions:
        return cls(
            max_file_size=properties.max_file_size,
            random_string_size=properties.random_string_size,
        )

    @classmethod
    def from_config(cls, config: Config) -> UploadOptions:
        """Build defaults from the ``httphelpers.uploads`` config section."""
        return cls.from_properties(config.bind(UploadProperties))


UploadOption = Callable[[UploadOptions], UploadOptions]


def with_max_file_size(size: int) -> UploadOption:
    """Override the maximum accepted file size, in bytes."""

    def apply(options: UploadOptions) -> UploadOptions:
        return dataclasses.replace(options, max_file_size=size)

    return apply


def with_random_string_size(size: int) -> UploadOption:
    """Override the length of the generated ``randomString``."""

    def apply(options: UploadOptions) -> UploadOptions:
        return dataclasses.replace(options, random_string_size=size)

    return apply


def with_random_source(source: random.Random) -> UploadOption:
    """Use *source* to generate ``randomString`` (e.g. a seeded generator in tests)."""

    def apply(options: UploadOptions) -> UploadOptions:
        return dataclasses.replace(options, random_source=source)

    return apply


def build_options(*options: UploadOption, defaults: UploadOptions | None = None) -> UploadOptions:
    """Apply *options* in order over *defaults* and return the resulting snapshot."""
    result = defaults if defaults is not None else UploadOptions()
    for option in options:
        result = option(result)
    return result
