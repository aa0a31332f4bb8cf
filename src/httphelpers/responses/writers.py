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
"""Typed response writers for text, HTML, and JSON bodies.

Every writer sets ``Content-Type`` first and writes the status only when it
falls outside the 2xx range; success codes rely on the sink's default of
200, so sinks that reject a second status write are never tripped.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

import structlog
from pydantic_core import PydanticSerializationError, to_jsonable_python

from httphelpers.responses.sink import ResponseSink

logger = structlog.get_logger(__name__)

TEXT_CONTENT_TYPE = "text/plain"
HTML_CONTENT_TYPE = "text/html"
JSON_CONTENT_TYPE = "application/json"

_MARSHAL_ERROR_BODY = json.dumps(
    {
        "message": "Error marshaling value for writing",
        "suggestion": "See error log for more information",
    },
    separators=(",", ":"),
).encode("utf-8")


def is_success_status(status: int) -> bool:
    """Return True if the status code falls within the 200-299 range."""
    return 200 <= status < 300


def _write(sink: ResponseSink, content_type: str, status: int, value: Any) -> None:
    sink.headers["content-type"] = content_type

    if not is_success_status(status):
        sink.write_header(status)

    if isinstance(value, bytes):
        sink.write(value)
    else:
        sink.write(str(value).encode("utf-8"))


def _to_json_data(value: Any) -> Any:
    """Normalize a value into something ``json.dumps`` understands.

    Pydantic models, dataclasses, datetimes, UUIDs, enums and sets nested
    anywhere in *value* are converted the way Pydantic serializes them.
    """
    return to_jsonable_python(value)


# =============================================================================
# Text
# =============================================================================


def write_text(sink: ResponseSink, status: int, value: Any) -> None:
    """Write *value* as a ``text/plain`` body."""
    _write(sink, TEXT_CONTENT_TYPE, status, value)


def text_ok(sink: ResponseSink, value: Any) -> None:
    write_text(sink, HTTPStatus.OK, value)


def text_bad_request(sink: ResponseSink, value: Any) -> None:
    write_text(sink, HTTPStatus.BAD_REQUEST, value)


def text_unauthorized(sink: ResponseSink, value: Any) -> None:
    write_text(sink, HTTPStatus.UNAUTHORIZED, value)


def text_internal_server_error(sink: ResponseSink, value: Any) -> None:
    write_text(sink, HTTPStatus.INTERNAL_SERVER_ERROR, value)


# =============================================================================
# HTML
# =============================================================================


def write_html(sink: ResponseSink, status: int, value: Any) -> None:
    """Write *value* as a ``text/html`` body. The markup is not escaped."""
    _write(sink, HTML_CONTENT_TYPE, status, value)


def html_ok(sink: ResponseSink, value: Any) -> None:
    write_html(sink, HTTPStatus.OK, value)


def html_bad_request(sink: ResponseSink, value: Any) -> None:
    write_html(sink, HTTPStatus.BAD_REQUEST, value)


def html_unauthorized(sink: ResponseSink, value: Any) -> None:
    write_html(sink, HTTPStatus.UNAUTHORIZED, value)


def html_internal_server_error(sink: ResponseSink, value: Any) -> None:
    write_html(sink, HTTPStatus.INTERNAL_SERVER_ERROR, value)


# =============================================================================
# JSON
# =============================================================================


def write_json(sink: ResponseSink, status: int, value: Any) -> None:
    """Serialize *value* as JSON and write it.

    If the value cannot be serialized, the error is logged and a 500 with a
    ``{"message", "suggestion"}`` envelope is written instead, whatever
    *status* was requested. Serialization errors never reach the caller.
    """
    sink.headers["content-type"] = JSON_CONTENT_TYPE

    try:
        body = json.dumps(
            _to_json_data(value),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.error(
            "json_serialization_failed",
            error=str(exc),
            value_type=type(value).__name__,
            requested_status=int(status),
        )
        sink.write_header(HTTPStatus.INTERNAL_SERVER_ERROR)
        sink.write(_MARSHAL_ERROR_BODY)
        return

    if not is_success_status(status):
        sink.write_header(status)

    sink.write(body)


def json_ok(sink: ResponseSink, value: Any) -> None:
    write_json(sink, HTTPStatus.OK, value)


def json_bad_request(sink: ResponseSink, value: Any) -> None:
    write_json(sink, HTTPStatus.BAD_REQUEST, value)


def json_unauthorized(sink: ResponseSink, value: Any) -> None:
    write_json(sink, HTTPStatus.UNAUTHORIZED, value)


def json_internal_server_error(sink: ResponseSink, value: Any) -> None:
    write_json(sink, HTTPStatus.INTERNAL_SERVER_ERROR, value)


def json_error_message(sink: ResponseSink, status: int, message: str) -> None:
    """Write ``{"message": message}`` with the given status."""
    write_json(sink, status, {"message": message})
