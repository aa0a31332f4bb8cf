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
"""Request helpers: typed value extraction, bearer tokens, and body decoding."""

from httphelpers.requests.body import decode_body, media_type
from httphelpers.requests.extraction import (
    bearer_token,
    extract,
    form_value,
    form_values,
    is_htmx,
    path_value,
    split_delimited,
)
from httphelpers.requests.kinds import ValueKind

__all__ = [
    "ValueKind",
    "bearer_token",
    "decode_body",
    "extract",
    "form_value",
    "form_values",
    "is_htmx",
    "media_type",
    "path_value",
    "split_delimited",
]
