"""Tests for the buffered response sink."""

from httphelpers.responses import BufferedResponse, ResponseSink


class TestBufferedResponse:
    def test_satisfies_sink_protocol(self):
        assert isinstance(BufferedResponse(), ResponseSink)

    def test_defaults(self):
        sink = BufferedResponse()
        assert sink.status_code == 200
        assert not sink.wrote_header
        assert sink.body == b""

    def test_first_status_wins(self):
        sink = BufferedResponse()
        sink.write_header(404)
        sink.write_header(500)
        assert sink.status_code == 404

    def test_write_commits_default_status(self):
        sink = BufferedResponse()
        sink.write(b"hello")
        sink.write_header(400)
        assert sink.wrote_header
        assert sink.status_code == 200

    def test_write_appends(self):
        sink = BufferedResponse()
        assert sink.write(b"ab") == 2
        sink.write(b"cd")
        assert sink.body == b"abcd"
        assert sink.text() == "abcd"

    def test_to_response(self):
        sink = BufferedResponse()
        sink.headers["content-type"] = "text/plain"
        sink.write_header(418)
        sink.write(b"teapot")

        response = sink.to_response()

        assert response.status_code == 418
        assert response.body == b"teapot"
        assert response.headers["content-type"] == "text/plain"
