"""Tests for the httphelpers exception hierarchy."""

from httphelpers.kernel.exceptions import (
    BodyDecodeException,
    BodyReadException,
    BusinessException,
    FileCopyException,
    FileCreateException,
    FileInfoNotFoundException,
    FileStatException,
    FileTooLargeException,
    FormParseException,
    HttpHelpersException,
    InfrastructureException,
    InvalidAuthorizationHeaderException,
    InvalidDestinationPathException,
    InvalidRequestException,
    PayloadTooLargeException,
    SecurityException,
    StreamWriteException,
    TemplateRenderException,
    UnauthorizedException,
    UnsupportedContentTypeException,
)


class TestHttpHelpersException:
    def test_basic_creation(self):
        exc = HttpHelpersException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.message == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_error_code(self):
        exc = HttpHelpersException("too big", code="FILE_TOO_LARGE")
        assert exc.code == "FILE_TOO_LARGE"

    def test_with_context(self):
        exc = HttpHelpersException("too big", code="FILE_TOO_LARGE", context={"size": 20, "limit": 10})
        assert exc.context["size"] == 20
        assert exc.context["limit"] == 10

    def test_context_defaults_to_empty_dict(self):
        exc = HttpHelpersException("test")
        exc.context["key"] = "value"
        assert HttpHelpersException("test2").context == {}


class TestExceptionHierarchy:
    def test_categories(self):
        for category in (BusinessException, SecurityException, InfrastructureException):
            assert issubclass(category, HttpHelpersException)

    def test_invalid_request_family(self):
        for exc_type in (
            UnsupportedContentTypeException,
            BodyDecodeException,
            FormParseException,
            FileInfoNotFoundException,
            TemplateRenderException,
        ):
            assert issubclass(exc_type, InvalidRequestException)
            assert issubclass(exc_type, BusinessException)

    def test_file_too_large_is_payload_too_large(self):
        assert issubclass(FileTooLargeException, PayloadTooLargeException)

    def test_security_family(self):
        assert issubclass(InvalidAuthorizationHeaderException, UnauthorizedException)
        assert issubclass(InvalidDestinationPathException, SecurityException)

    def test_infrastructure_family(self):
        for exc_type in (
            BodyReadException,
            FileStatException,
            FileCreateException,
            FileCopyException,
            StreamWriteException,
        ):
            assert issubclass(exc_type, InfrastructureException)

    def test_catch_all(self):
        exceptions = [
            BodyDecodeException("bad body"),
            FileTooLargeException("too big", code="FILE_TOO_LARGE"),
            InvalidDestinationPathException("escape"),
            FileCopyException("disk full"),
        ]
        for exc in exceptions:
            try:
                raise exc
            except HttpHelpersException as caught:
                assert caught is exc

    def test_subclass_keeps_message(self):
        exc = FileTooLargeException(
            "file size of 9 bytes exceeds the limit of 5 bytes",
            code="FILE_TOO_LARGE",
            context={"size": 9, "limit": 5},
        )
        assert exc.message == "file size of 9 bytes exceeds the limit of 5 bytes"
        assert exc.message == str(exc)
