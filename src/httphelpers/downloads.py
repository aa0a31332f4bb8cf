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
"""File downloads: stream bytes, readers, and open files as attachments."""

from __future__ import annotations

import os
import shutil
from typing import BinaryIO

import structlog

from httphelpers.kernel.exceptions import FileStatException, StreamWriteException
from httphelpers.responses.sink import ResponseSink

logger = structlog.get_logger(__name__)

CSV_CONTENT_TYPE = "text/csv"


def _set_attachment_headers(sink: ResponseSink, filename: str, content_type: str, size: int) -> None:
    # The filename is interpolated verbatim; quotes and control characters
    # are the caller's responsibility.
    sink.headers["content-disposition"] = f'attachment; filename="{filename}"'
    sink.headers["content-type"] = content_type
    sink.headers["content-length"] = str(size)


def stream_bytes(sink: ResponseSink, filename: str, content_type: str, content: bytes) -> None:
    """Write *content* to the sink as an attachment named *filename*.

    Raises:
        StreamWriteException: If the sink rejects the write.
    """
    _set_attachment_headers(sink, filename, content_type, len(content))

    try:
        sink.write(content)
    except OSError as exc:
        raise StreamWriteException(
            f"error writing '{filename}' to response: {exc}",
            code="STREAM_WRITE_ERROR",
            context={"filename": filename},
        ) from exc

    logger.debug("download_streamed", filename=filename, size=len(content))


def stream_content(sink: ResponseSink, filename: str, content_type: str, reader: BinaryIO, size: int) -> None:
    """Copy *reader* to the sink as an attachment of *size* bytes.

    The declared *size* is sent as ``Content-Length`` as-is; it is not
    checked against the number of bytes actually copied.

    Raises:
        StreamWriteException: If reading or writing fails mid-copy.
    """
    _set_attachment_headers(sink, filename, content_type, size)

    try:
        shutil.copyfileobj(reader, sink)  # type: ignore[misc]
    except OSError as exc:
        raise StreamWriteException(
            f"error streaming '{filename}' to response: {exc}",
            code="STREAM_WRITE_ERROR",
            context={"filename": filename},
        ) from exc

    logger.debug("download_streamed", filename=filename, size=size)


def download_file(sink: ResponseSink, filename: str, content_type: str, file: BinaryIO) -> None:
    """Stream an open file, using its on-disk size as ``Content-Length``.

    Raises:
        FileStatException: If the file size cannot be determined.
        StreamWriteException: If copying to the sink fails.
    """
    try:
        size = os.fstat(file.fileno()).st_size
    except (OSError, ValueError) as exc:
        raise FileStatException(
            f"error getting file info: {exc}",
            code="FILE_STAT_ERROR",
            context={"filename": filename},
        ) from exc

    stream_content(sink, filename, content_type, file, size)


def download_csv(sink: ResponseSink, filename: str, content: bytes) -> None:
    """Send *content* as a ``text/csv`` attachment."""
    stream_bytes(sink, filename, CSV_CONTENT_TYPE, content)


def download_csv_file(sink: ResponseSink, filename: str, file: BinaryIO) -> None:
    """Send an open file as a ``text/csv`` attachment."""
    download_file(sink, filename, CSV_CONTENT_TYPE, file)
