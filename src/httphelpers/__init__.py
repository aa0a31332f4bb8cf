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
"""httphelpers — typed request extraction, response writing, downloads, and uploads for Starlette.

Usage::

    from httphelpers import BufferedResponse, ValueKind, extract, json_ok

    async def list_orders(request: Request) -> Response:
        page = await extract(request, "page", ValueKind.INT)
        sink = BufferedResponse()
        json_ok(sink, {"page": page})
        return sink.to_response()
"""

from httphelpers.core.config import Config, config_properties
from httphelpers.downloads import download_csv, download_csv_file, download_file, stream_bytes, stream_content
from httphelpers.kernel.exceptions import HttpHelpersException
from httphelpers.requests import (
    ValueKind,
    bearer_token,
    decode_body,
    extract,
    is_htmx,
    split_delimited,
)
from httphelpers.responses import (
    BufferedResponse,
    ResponseSink,
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
from httphelpers.uploads import (
    UploadedFile,
    UploadOptions,
    open_uploaded_file,
    read_uploaded_file,
    upload_file_to_dir,
    with_max_file_size,
    with_random_source,
    with_random_string_size,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Config",
    "HttpHelpersException",
    "config_properties",
    # Requests
    "ValueKind",
    "bearer_token",
    "decode_body",
    "extract",
    "is_htmx",
    "split_delimited",
    # Responses
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
    # Downloads
    "download_csv",
    "download_csv_file",
    "download_file",
    "stream_bytes",
    "stream_content",
    # Uploads
    "UploadOptions",
    "UploadedFile",
    "open_uploaded_file",
    "read_uploaded_file",
    "upload_file_to_dir",
    "with_max_file_size",
    "with_random_source",
    "with_random_string_size",
]
