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
"""Typed value extraction from form, query, and path parameters.

Values are looked up in the form body first, then the query string; scalar
kinds fall back to the path parameter when that lookup is empty. Extraction
never raises: a missing or malformed value yields the kind's zero value, so
callers that must tell "absent" from "invalid" should read the raw values
with :func:`form_values` instead.
"""

from __future__ import annotations

from typing import Any

from starlette.datastructures import FormData
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

from httphelpers.kernel.exceptions import InvalidAuthorizationHeaderException
from httphelpers.requests.kinds import ValueKind


async def _load_form(request: Request) -> FormData:
    # An unparsable body degrades to the query string alone.
    try:
        return await request.form()
    except (MultiPartException, HTTPException):
        return FormData()


async def form_values(request: Request, name: str) -> list[str]:
    """Return every form and query value bound to *name*, form values first.

    File parts of a multipart body are skipped.
    """
    form = await _load_form(request)
    values = [value for value in form.getlist(name) if isinstance(value, str)]
    values.extend(request.query_params.getlist(name))
    return values


async def form_value(request: Request, name: str) -> str:
    """Return the first form or query value bound to *name*, or ``""``."""
    values = await form_values(request, name)
    return values[0] if values else ""


def path_value(request: Request, name: str) -> str:
    """Return the path parameter *name* as a string, or ``""``."""
    value = request.path_params.get(name)
    return "" if value is None else str(value)


async def extract(request: Request, name: str, kind: ValueKind) -> Any:
    """Extract *name* from the request as *kind*.

    Usage::

        page = await extract(request, "page", ValueKind.INT)
        tags = await extract(request, "tag", ValueKind.STRING_LIST)
    """
    if kind is ValueKind.STRING_LIST:
        return await form_values(request, name)

    if kind.is_sequence:
        result = []
        for raw in await form_values(request, name):
            try:
                result.append(kind.parse(raw))
            except ValueError:
                continue
        return result

    raw = await form_value(request, name)
    if raw == "":
        raw = path_value(request, name)

    try:
        return kind.parse(raw)
    except ValueError:
        return kind.zero()


async def split_delimited(request: Request, name: str, separator: str) -> list[str]:
    """Split the form or query value *name* on *separator*.

    Segments are returned as-is, without trimming or dropping empties; an
    absent value yields ``[""]``.
    """
    value = await form_value(request, name)
    if separator == "":
        return list(value)
    return value.split(separator)


def bearer_token(request: Request) -> str:
    """Return the token of a ``Bearer`` Authorization header.

    Raises:
        InvalidAuthorizationHeaderException: If the header is missing or is
            not exactly ``Bearer <token>``.
    """
    parts = request.headers.get("authorization", "").split()

    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise InvalidAuthorizationHeaderException(
            "invalid bearer authorization header",
            code="INVALID_AUTHORIZATION_HEADER",
        )

    return parts[1]


def is_htmx(request: Request) -> bool:
    """Return True if the request was sent by the htmx library."""
    return request.headers.get("hx-request", "") != ""
