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
"""Unified exception hierarchy for httphelpers.

All helper exceptions inherit from HttpHelpersException, so callers can catch
one base class or a specific subclass.

Categories:
- BusinessException: malformed input (bad headers, bodies, forms, templates)
  and resource limits
- SecurityException: authentication header errors and unsafe paths
- InfrastructureException: file system and stream I/O failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class HttpHelpersException(Exception):
    """Base exception for all httphelpers errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "UNSUPPORTED_CONTENT_TYPE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(HttpHelpersException):
    """Malformed input and request-level rule violations."""


class InvalidRequestException(BusinessException):
    """Request is syntactically or semantically unusable."""


class UnsupportedContentTypeException(InvalidRequestException):
    """The request body has a content type that cannot be decoded."""


class BodyDecodeException(InvalidRequestException):
    """The request body could not be deserialized into the target type.

    The raw body is kept in ``context["contents"]``.
    """


class FormParseException(InvalidRequestException):
    """The multipart form could not be parsed."""


class FileInfoNotFoundException(InvalidRequestException):
    """The requested form field is missing or does not carry a file."""


class TemplateRenderException(InvalidRequestException):
    """A destination file name template failed to parse or render."""


class PayloadTooLargeException(BusinessException):
    """The request payload exceeds the maximum allowed size."""


class FileTooLargeException(PayloadTooLargeException):
    """An uploaded file is larger than the configured maximum.

    ``context`` carries ``size`` and ``limit`` in bytes.
    """


# =============================================================================
# Security Exceptions
# =============================================================================


class SecurityException(HttpHelpersException):
    """Authentication errors and unsafe file system targets."""


class UnauthorizedException(SecurityException):
    """Authentication is required but was not provided or is invalid."""


class InvalidAuthorizationHeaderException(UnauthorizedException):
    """The Authorization header is missing or is not a bearer token."""


class InvalidDestinationPathException(SecurityException):
    """A rendered file name would escape its destination directory."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(HttpHelpersException):
    """File system and stream I/O failures."""


class BodyReadException(InfrastructureException):
    """The request body stream could not be read."""


class FileStatException(InfrastructureException):
    """File metadata could not be read."""


class FileCreateException(InfrastructureException):
    """A destination file could not be created."""


class FileCopyException(InfrastructureException):
    """Copying an uploaded stream to its destination failed."""


class StreamWriteException(InfrastructureException):
    """Writing to the response sink failed."""
