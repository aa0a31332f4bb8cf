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
"""Request body decoding into typed values."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError
from starlette.requests import ClientDisconnect, Request

from httphelpers.converters import xml_document_content
from httphelpers.kernel.exceptions import (
    BodyDecodeException,
    BodyReadException,
    UnsupportedContentTypeException,
)

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"


def media_type(content_type: str) -> str:
    """Strip parameters from a Content-Type value (``text/html; charset=x`` -> ``text/html``)."""
    return content_type.split(";", 1)[0].strip().lower()


async def decode_body(request: Request, target: type[T]) -> T:
    """Read the whole request body and decode it into *target*.

    ``application/json`` and ``application/xml`` bodies are supported; the
    target may be a Pydantic model, a dataclass, or any type Pydantic can
    validate. XML bodies are matched against the target using the children
    of the root element.

    Raises:
        BodyReadException: If the body stream cannot be read.
        UnsupportedContentTypeException: For any other content type.
        BodyDecodeException: If the body does not deserialize into *target*,
            including an empty body.
    """
    try:
        body = await request.body()
    except (ClientDisconnect, RuntimeError) as exc:
        raise BodyReadException(f"error reading request body: {exc}", code="BODY_READ_ERROR") from exc

    content_type = request.headers.get("content-type", "")
    adapter = TypeAdapter(target)
    declared = media_type(content_type)

    if declared == JSON_MEDIA_TYPE:
        try:
            return adapter.validate_json(body)
        except ValidationError as exc:
            raise _decode_error(exc, body) from exc

    if declared == XML_MEDIA_TYPE:
        try:
            return adapter.validate_python(xml_document_content(body))
        except (ET.ParseError, ValidationError) as exc:
            raise _decode_error(exc, body) from exc

    raise UnsupportedContentTypeException(
        f"unsupported content type: {content_type}",
        code="UNSUPPORTED_CONTENT_TYPE",
        context={"content_type": content_type},
    )


def _decode_error(exc: Exception, body: bytes) -> BodyDecodeException:
    contents = body.decode("utf-8", errors="replace")
    return BodyDecodeException(
        f"error unmarshaling body to destination: {exc}, contents: {contents}",
        code="BODY_DECODE_ERROR",
        context={"contents": body},
    )
