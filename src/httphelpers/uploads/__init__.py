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
"""Multipart file uploads: scoped reading, size limits, and saving to disk."""

from httphelpers.uploads.files import UploadedFile
from httphelpers.uploads.naming import random_string, render_file_name, template_variables
from httphelpers.uploads.options import (
    UploadOption,
    UploadOptions,
    build_options,
    with_max_file_size,
    with_random_source,
    with_random_string_size,
)
from httphelpers.uploads.reader import UploadCallback, open_uploaded_file, read_uploaded_file
from httphelpers.uploads.storage import destination_path, save_to_dir, upload_file_to_dir

__all__ = [
    "UploadCallback",
    "UploadOption",
    "UploadOptions",
    "UploadedFile",
    "build_options",
    "destination_path",
    "open_uploaded_file",
    "random_string",
    "read_uploaded_file",
    "render_file_name",
    "save_to_dir",
    "template_variables",
    "upload_file_to_dir",
    "with_max_file_size",
    "with_random_source",
    "with_random_string_size",
]
