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
"""UploadedFile — an uploaded multipart file and where it was saved."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import BinaryIO

from starlette.datastructures import Headers


@dataclass
class UploadedFile:
    """A file received in a multipart form field.

    ``file`` is only usable inside the callback (or ``async with`` block)
    that received it; it is closed as soon as that scope ends. The ``saved_*``
    attributes are filled in by :func:`httphelpers.uploads.upload_file_to_dir`.

    Attributes:
        file: Open binary stream with the uploaded content.
        filename: Filename sent by the client, possibly with directories.
        size: Declared size in bytes.
        headers: MIME headers of the multipart part.
        content_type: Content type of the part, if sent.
        ext: Extension of the saved file, dot included.
        saved_file: Generated file name on disk.
        saved_file_path: Absolute path of the saved file.
    """

    file: BinaryIO
    filename: str
    size: int
    headers: Headers = field(default_factory=Headers)
    content_type: str | None = None
    ext: str = ""
    saved_file: str = ""
    saved_file_path: str = ""

    @property
    def base_filename(self) -> str:
        return os.path.basename(self.filename)

    def read(self, size: int = -1) -> bytes:
        """Read from the uploaded stream."""
        return self.file.read(size)
