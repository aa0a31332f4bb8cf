"""Tests for MockHttpClient and the HttpClient port."""

import httpx
import pytest

from httphelpers.client import HttpClient
from httphelpers.testing import MockHttpClient


def get(url: str) -> httpx.Request:
    return httpx.Request("GET", url)


class TestHttpClientPort:
    def test_mock_satisfies_port(self):
        assert isinstance(MockHttpClient(), HttpClient)

    def test_httpx_client_satisfies_port(self):
        with httpx.Client() as client:
            assert isinstance(client, HttpClient)


class TestMockHttpClient:
    def test_replays_responses_in_order(self):
        client = MockHttpClient()
        client.on_send(httpx.Response(200, json={"n": 1})).on_send(httpx.Response(404))

        first = client.send(get("https://api.example.com/a"))
        second = client.send(get("https://api.example.com/b"))

        assert first.json() == {"n": 1}
        assert second.status_code == 404
        client.verify_call_count()

    def test_records_calls(self):
        client = MockHttpClient().on_send(httpx.Response(204))
        client.send(get("https://api.example.com/forecast"))
        assert client.calls[0].request.url.path == "/forecast"
        assert client.calls[0].expectation.response.status_code == 204

    def test_queued_error_is_raised(self):
        client = MockHttpClient().on_send(error=httpx.ConnectError("refused"))
        with pytest.raises(httpx.ConnectError, match="refused"):
            client.send(get("https://api.example.com/"))
        assert len(client.calls) == 1

    def test_unexpected_call(self):
        client = MockHttpClient()
        with pytest.raises(AssertionError, match="called more times than expected"):
            client.send(get("https://api.example.com/"))

    def test_verify_call_count_fails_on_unused_expectations(self):
        client = MockHttpClient().on_send(httpx.Response(200))
        with pytest.raises(AssertionError, match="expected 1 calls, but got 0"):
            client.verify_call_count()
