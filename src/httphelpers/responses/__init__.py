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
"""Response helpers: the sink port and typed body writers."""

from httphelpers.responses.sink import BufferedResponse, ResponseSink
from httphelpers.responses.writers import (
    html_bad_request,
    html_internal_server_error,
    html_ok,
    html_unauthorized,
    is_success_status,
    json_bad_request,
    json_error_message,
    json_internal_server_error,
    json_ok,
    json_unauthorized,
    text_bad_request,
    text_internal_server_error,
    text_ok,
    text_unauthorized,
    write_html,
    write_json,
    write_text,
)

__all__ = [
    "BufferedResponse",
    "ResponseSink",
    "html_bad_request",
    "html_internal_server_error",
    "html_ok",
    "html_unauthorized",
    "is_success_status",
    "json_bad_request",
    "json_error_message",
    "json_internal_server_error",
    "json_ok",
    "json_unauthorized",
    "text_bad_request",
    "text_internal_server_error",
    "text_ok",
    "text_unauthorized",
    "write_html",
    "write_json",
    "write_text",
]
