"""Tests for request body decoding."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from httphelpers.kernel.exceptions import BodyDecodeException, UnsupportedContentTypeException
from httphelpers.requests import decode_body, media_type
from httphelpers.testing import build_request


class Payload(BaseModel):
    name: str
    age: int


class Tagged(BaseModel):
    name: str
    tags: list[str]


@dataclass
class PayloadRecord:
    name: str
    age: int


def body_request(content: bytes | str, content_type: str | None):
    headers = {"content-type": content_type} if content_type is not None else {}
    return build_request("POST", "/", content=content, headers=headers)


class TestDecodeJson:
    @pytest.mark.asyncio
    async def test_round_trip(self):
        payload = Payload(name="Adam", age=30)
        request = body_request(payload.model_dump_json(), "application/json")
        assert await decode_body(request, Payload) == payload

    @pytest.mark.asyncio
    async def test_charset_parameter_is_ignored(self):
        request = body_request(json.dumps({"name": "Adam", "age": 30}), "application/json; charset=utf-8")
        result = await decode_body(request, Payload)
        assert result.age == 30

    @pytest.mark.asyncio
    async def test_dataclass_target(self):
        request = body_request(json.dumps({"name": "Eve", "age": 41}), "application/json")
        assert await decode_body(request, PayloadRecord) == PayloadRecord(name="Eve", age=41)

    @pytest.mark.asyncio
    async def test_bad_json_keeps_raw_contents(self):
        raw = '{"name": "Adam", "age": }'
        with pytest.raises(BodyDecodeException, match="error unmarshaling body to destination") as exc_info:
            await decode_body(body_request(raw, "application/json"), Payload)
        assert exc_info.value.context["contents"] == raw.encode()
        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    async def test_empty_body_is_a_decode_error(self):
        with pytest.raises(BodyDecodeException):
            await decode_body(body_request(b"", "application/json"), Payload)

    @pytest.mark.asyncio
    async def test_wrong_shape_is_a_decode_error(self):
        with pytest.raises(BodyDecodeException):
            await decode_body(body_request(json.dumps({"name": "Adam"}), "application/json"), Payload)


class TestDecodeXml:
    @pytest.mark.asyncio
    async def test_round_trip(self):
        xml = "<Payload><name>Adam</name><age>30</age></Payload>"
        result = await decode_body(body_request(xml, "application/xml"), Payload)
        assert result == Payload(name="Adam", age=30)

    @pytest.mark.asyncio
    async def test_repeated_elements_become_lists(self):
        xml = "<Tagged><name>x</name><tags>a</tags><tags>b</tags></Tagged>"
        result = await decode_body(body_request(xml, "application/xml"), Tagged)
        assert result.tags == ["a", "b"]

    @pytest.mark.asyncio
    async def test_malformed_xml(self):
        with pytest.raises(BodyDecodeException):
            await decode_body(body_request("<Payload><name>", "application/xml"), Payload)

    @pytest.mark.asyncio
    async def test_empty_body_is_a_decode_error(self):
        with pytest.raises(BodyDecodeException):
            await decode_body(body_request(b"", "application/xml"), Payload)


class TestUnsupportedContentType:
    @pytest.mark.asyncio
    async def test_text_plain(self):
        with pytest.raises(UnsupportedContentTypeException, match="unsupported content type: text/plain"):
            await decode_body(body_request("text content", "text/plain"), Payload)

    @pytest.mark.asyncio
    async def test_missing_content_type(self):
        with pytest.raises(UnsupportedContentTypeException, match="unsupported content type"):
            await decode_body(body_request("{}", None), Payload)


class TestMediaType:
    def test_strips_parameters_and_case(self):
        assert media_type("Application/JSON; charset=utf-8") == "application/json"

    def test_empty(self):
        assert media_type("") == ""
