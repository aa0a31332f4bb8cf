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
"""Response sink port and its buffered implementation."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol, runtime_checkable

import structlog
from starlette.datastructures import MutableHeaders
from starlette.responses import Response

logger = structlog.get_logger(__name__)


@runtime_checkable
class ResponseSink(Protocol):
    """Writable side of an HTTP exchange.

    Headers may be changed until the status is written. The status is
    write-once; writing body bytes first commits the default status 200.
    """

    @property
    def headers(self) -> MutableMapping[str, str]: ...

    def write_header(self, status_code: int) -> None: ...

    def write(self, data: bytes) -> int: ...


class BufferedResponse:
    """In-memory ResponseSink that converts into a Starlette Response.

    Usage in a Starlette endpoint::

        async def endpoint(request: Request) -> Response:
            sink = BufferedResponse()
            json_ok(sink, {"status": "ok"})
            return sink.to_response()
    """

    def __init__(self) -> None:
        self._headers = MutableHeaders()
        self._status_code = 200
        self._wrote_header = False
        self._body = bytearray()

    @property
    def headers(self) -> MutableHeaders:
        return self._headers

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def wrote_header(self) -> bool:
        return self._wrote_header

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def write_header(self, status_code: int) -> None:
        """Commit the response status. Only the first call has any effect."""
        if self._wrote_header:
            logger.warning(
                "superfluous_write_header",
                status_code=status_code,
                committed=self._status_code,
            )
            return
        self._status_code = int(status_code)
        self._wrote_header = True

    def write(self, data: bytes) -> int:
        if not self._wrote_header:
            self.write_header(200)
        self._body.extend(data)
        return len(data)

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the buffered body."""
        return self._body.decode(encoding)

    def to_response(self) -> Response:
        """Build a Starlette Response from the buffered status, headers, and body."""
        return Response(
            content=bytes(self._body),
            status_code=self._status_code,
            headers=dict(self._headers.items()),
        )
