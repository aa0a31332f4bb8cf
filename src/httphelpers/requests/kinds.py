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
"""ValueKind — the closed set of types a request value can be extracted as."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from functools import partial
from typing import Any

from httphelpers.requests.parsing import parse_bool, parse_float, parse_int, parse_uint


class ValueKind(Enum):
    """Target kind for :func:`httphelpers.requests.extract`.

    Scalar kinds resolve one value and fall back to the zero value when it is
    absent or unparsable. ``*_LIST`` kinds collect every form/query value
    bound to the name, dropping the entries that fail to parse.
    """

    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BOOL = "bool"

    INT_LIST = "list[int]"
    INT32_LIST = "list[int32]"
    INT64_LIST = "list[int64]"
    UINT_LIST = "list[uint]"
    UINT32_LIST = "list[uint32]"
    UINT64_LIST = "list[uint64]"
    FLOAT32_LIST = "list[float32]"
    FLOAT64_LIST = "list[float64]"
    STRING_LIST = "list[string]"

    @property
    def is_sequence(self) -> bool:
        return self in _ELEMENT_KINDS

    @property
    def element(self) -> ValueKind:
        """The scalar kind of each entry of a sequence kind (self for scalars)."""
        return _ELEMENT_KINDS.get(self, self)

    def zero(self) -> Any:
        """A fresh zero value for this kind."""
        if self.is_sequence:
            return []
        return _ZEROS[self]

    def parse(self, value: str) -> Any:
        """Parse one raw string as this kind's scalar; raises ValueError."""
        return _PARSERS[self.element](value)


_ELEMENT_KINDS: dict[ValueKind, ValueKind] = {
    ValueKind.INT_LIST: ValueKind.INT,
    ValueKind.INT32_LIST: ValueKind.INT32,
    ValueKind.INT64_LIST: ValueKind.INT64,
    ValueKind.UINT_LIST: ValueKind.UINT,
    ValueKind.UINT32_LIST: ValueKind.UINT32,
    ValueKind.UINT64_LIST: ValueKind.UINT64,
    ValueKind.FLOAT32_LIST: ValueKind.FLOAT32,
    ValueKind.FLOAT64_LIST: ValueKind.FLOAT64,
    ValueKind.STRING_LIST: ValueKind.STRING,
}

_PARSERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.INT: partial(parse_int, bits=64),
    ValueKind.INT32: partial(parse_int, bits=32),
    ValueKind.INT64: partial(parse_int, bits=64),
    ValueKind.UINT: partial(parse_uint, bits=64),
    ValueKind.UINT32: partial(parse_uint, bits=32),
    ValueKind.UINT64: partial(parse_uint, bits=64),
    ValueKind.FLOAT32: partial(parse_float, bits=32),
    ValueKind.FLOAT64: partial(parse_float, bits=64),
    ValueKind.STRING: str,
    ValueKind.BOOL: parse_bool,
}

_ZEROS: dict[ValueKind, Any] = {
    ValueKind.INT: 0,
    ValueKind.INT32: 0,
    ValueKind.INT64: 0,
    ValueKind.UINT: 0,
    ValueKind.UINT32: 0,
    ValueKind.UINT64: 0,
    ValueKind.FLOAT32: 0.0,
    ValueKind.FLOAT64: 0.0,
    ValueKind.STRING: "",
    ValueKind.BOOL: False,
}
