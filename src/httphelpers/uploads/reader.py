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
"""Reading a single file field out of a multipart request.

The uploaded stream is handed to the caller for the duration of one scope
and closed unconditionally when that scope ends.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

import structlog
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

from httphelpers.kernel.exceptions import (
    FileInfoNotFoundException,
    FileTooLargeException,
    FormParseException,
)
from httphelpers.requests.body import media_type
from httphelpers.uploads.files import UploadedFile
from httphelpers.uploads.options import UploadOption, UploadOptions, build_options

logger = structlog.get_logger(__name__)

MULTIPART_MEDIA_TYPE = "multipart/form-data"

UploadCallback = Callable[[UploadedFile, UploadOptions], Awaitable[Any] | Any]


async def _parse_multipart(request: Request, options: UploadOptions) -> Any:
    content_type = request.headers.get("content-type", "")
    if media_type(content_type) != MULTIPART_MEDIA_TYPE:
        raise FormParseException(
            f"error parsing form data: request Content-Type isn't {MULTIPART_MEDIA_TYPE}",
            code="FORM_PARSE_ERROR",
            context={"content_type": content_type},
        )

    try:
        return await request.form(max_part_size=options.max_file_size)
    except MultiPartException as exc:
        raise FormParseException(f"error parsing form data: {exc.message}", code="FORM_PARSE_ERROR") from exc
    except HTTPException as exc:
        raise FormParseException(f"error parsing form data: {exc.detail}", code="FORM_PARSE_ERROR") from exc


@asynccontextmanager
async def open_uploaded_file(
    field_name: str,
    request: Request,
    options: UploadOptions | None = None,
) -> AsyncIterator[UploadedFile]:
    """Parse the multipart body and yield the file sent in *field_name*.

    Usage::

        async with open_uploaded_file("avatar", request) as upload:
            data = upload.read()

    Raises:
        FormParseException: If the request is not a valid multipart form.
        FileInfoNotFoundException: If *field_name* is missing or not a file.
        FileTooLargeException: If the file is larger than
            ``options.max_file_size``; the stream is closed without being
            yielded.
    """
    if options is None:
        options = UploadOptions()

    form = await _parse_multipart(request, options)

    part = form.get(field_name)
    if not isinstance(part, UploadFile):
        raise FileInfoNotFoundException(
            f"error retrieving file info from form: no file in field '{field_name}'",
            code="FILE_INFO_NOT_FOUND",
            context={"field": field_name},
        )

    try:
        size = part.size if part.size is not None else 0
        if size > options.max_file_size:
            raise FileTooLargeException(
                f"file size of {size} bytes exceeds the limit of {options.max_file_size} bytes",
                code="FILE_TOO_LARGE",
                context={"size": size, "limit": options.max_file_size},
            )

        logger.debug("upload_received", field=field_name, filename=part.filename, size=size)

        yield UploadedFile(
            file=part.file,  # type: ignore[arg-type]
            filename=part.filename or "",
            size=size,
            headers=part.headers,
            content_type=part.content_type,
        )
    finally:
        await part.close()


async def read_uploaded_file(
    field_name: str,
    request: Request,
    callback: UploadCallback,
    *options: UploadOption,
    defaults: UploadOptions | None = None,
) -> Any:
    """Invoke *callback* with the file uploaded in *field_name*.

    The callback receives the :class:`UploadedFile` and the effective
    options; it may be a plain function or a coroutine function. Its return
    value is passed through. The stream is closed when the callback returns
    or raises.

    Usage::

        async def store(upload: UploadedFile, options: UploadOptions) -> None:
            bucket.put(upload.filename, upload.read())

        await read_uploaded_file("document", request, store, with_max_file_size(5 << 20))
    """
    effective = build_options(*options, defaults=defaults)

    async with open_uploaded_file(field_name, request, effective) as upload:
        result = callback(upload, effective)
        if inspect.isawaitable(result):
            result = await result
        return result
