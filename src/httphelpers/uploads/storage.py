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
"""Saving an uploaded file into a directory under a templated name."""

from __future__ import annotations

import os
import shutil

import structlog
from starlette.requests import Request

from httphelpers.kernel.exceptions import (
    FileCopyException,
    FileCreateException,
    HttpHelpersException,
    InvalidDestinationPathException,
)
from httphelpers.uploads.files import UploadedFile
from httphelpers.uploads.naming import file_extension, random_string, render_file_name, template_variables
from httphelpers.uploads.options import UploadOption, UploadOptions
from httphelpers.uploads.reader import read_uploaded_file

logger = structlog.get_logger(__name__)


def destination_path(dest_dir: str | os.PathLike[str], file_name: str) -> str:
    """Join *file_name* onto *dest_dir* and check it stays under that directory.

    The check is a string prefix test of the normalized joined path against
    the normalized directory. It stops ``../`` escapes, but a sibling that
    shares the directory's name as a prefix (``uploads`` / ``uploads-x``)
    still passes.

    Raises:
        InvalidDestinationPathException: If the joined path leaves *dest_dir*.
    """
    directory = os.path.normpath(os.fspath(dest_dir))
    final_path = os.path.normpath(os.path.join(directory, file_name))

    if not final_path.startswith(directory):
        raise InvalidDestinationPathException(
            f"invalid destination file path attempted: {file_name}",
            code="INVALID_DESTINATION_PATH",
            context={"dest_dir": directory, "file_name": file_name},
        )

    return final_path


def save_to_dir(
    upload: UploadedFile,
    options: UploadOptions,
    dest_dir: str | os.PathLike[str],
    name_template: str,
) -> UploadedFile:
    """Render the destination name, then copy the upload stream into it.

    Fills in ``saved_file``, ``saved_file_path`` and ``ext`` on *upload*.
    A file that was created stays on disk if the copy fails.
    """
    variables = template_variables(
        upload.filename,
        upload.size,
        random_string(options.random_string_size, options.random_source),
    )
    file_name = render_file_name(name_template, variables)
    final_path = destination_path(dest_dir, file_name)

    try:
        destination = open(final_path, "wb")
    except OSError as exc:
        raise FileCreateException(
            f"error creating file '{file_name}': {exc}",
            code="FILE_CREATE_ERROR",
            context={"path": final_path},
        ) from exc

    with destination:
        try:
            upload.file.seek(0)
            shutil.copyfileobj(upload.file, destination)
        except OSError as exc:
            raise FileCopyException(
                f"error copying uploaded file '{upload.filename}' to '{file_name}': {exc}",
                code="FILE_COPY_ERROR",
                context={"path": final_path},
            ) from exc

    upload.saved_file_path = os.path.abspath(final_path)
    upload.saved_file = os.path.basename(final_path)
    upload.ext = file_extension(final_path)

    logger.debug("upload_saved", path=upload.saved_file_path, size=upload.size)
    return upload


async def upload_file_to_dir(
    field_name: str,
    request: Request,
    dest_dir: str | os.PathLike[str],
    name_template: str,
    *options: UploadOption,
    defaults: UploadOptions | None = None,
) -> UploadedFile:
    """Save the file uploaded in *field_name* into *dest_dir*.

    *name_template* is a Jinja2 template rendered with ``fileName``,
    ``baseFileName``, ``ext``, ``size`` and ``randomString``; unknown
    variables are an error. The directory must already exist.

    Usage::

        upload = await upload_file_to_dir(
            "attachment", request, "/srv/uploads", "{{randomString}}{{ext}}"
        )
        print(upload.saved_file_path)

    If a step after the file was received fails, the partially populated
    :class:`UploadedFile` is available as ``exc.context["upload"]``.
    """

    def save(upload: UploadedFile, effective: UploadOptions) -> UploadedFile:
        try:
            return save_to_dir(upload, effective, dest_dir, name_template)
        except HttpHelpersException as exc:
            exc.context["upload"] = upload
            raise

    return await read_uploaded_file(field_name, request, save, *options, defaults=defaults)
