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
"""Canonical text parsers for extracted request values.

The grammar is narrower than Python's own ``int()`` and
``float()``: no surrounding whitespace, no digit separators, and integers
must fit the declared bit size. Every parser raises ``ValueError`` on bad
input; callers decide what a failure means.
"""

from __future__ import annotations

import math
import re
import struct

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(value: str, bits: int = 64) -> int:
    """Parse a base-10 signed integer that fits in *bits* bits."""
    if not _SIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid signed integer: {value!r}")
    result = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= result < limit:
        raise ValueError(f"{value!r} out of range for int{bits}")
    return result


def parse_uint(value: str, bits: int = 64) -> int:
    """Parse a base-10 unsigned integer that fits in *bits* bits."""
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid unsigned integer: {value!r}")
    result = int(value)
    if result >= 1 << bits:
        raise ValueError(f"{value!r} out of range for uint{bits}")
    return result


def parse_float(value: str, bits: int = 64) -> float:
    """Parse a floating point number at 32 or 64 bit precision.

    Finite literals that overflow the precision are rejected. 32-bit values
    are rounded to the nearest single precision float.
    """
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"invalid float: {value!r}")
    result = float(value)
    if math.isinf(result) and "inf" not in value.lower():
        raise ValueError(f"{value!r} out of range for float{bits}")
    if bits == 32:
        try:
            result = struct.unpack("<f", struct.pack("<f", result))[0]
        except OverflowError as exc:
            raise ValueError(f"{value!r} out of range for float32") from exc
    return result


def parse_bool(value: str) -> bool:
    """Parse the fixed set of boolean spellings (``1``, ``t``, ``true``, ...)."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")
