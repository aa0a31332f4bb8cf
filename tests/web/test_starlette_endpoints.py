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
"""End-to-end tests: the helpers behind real Starlette endpoints."""

import pytest
from pydantic import BaseModel
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route
from starlette.testclient import TestClient

from httphelpers import (
    BufferedResponse,
    HttpHelpersException,
    ValueKind,
    bearer_token,
    decode_body,
    download_csv,
    extract,
    json_bad_request,
    json_error_message,
    json_ok,
    text_ok,
    text_unauthorized,
    upload_file_to_dir,
    with_max_file_size,
    with_random_string_size,
)
from httphelpers.kernel.exceptions import FileTooLargeException, InvalidAuthorizationHeaderException


class Order(BaseModel):
    sku: str
    quantity: int


async def show_item(request: Request) -> Response:
    sink = BufferedResponse()
    json_ok(
        sink,
        {
            "item_id": await extract(request, "item_id", ValueKind.INT),
            "tags": await extract(request, "tag", ValueKind.STRING_LIST),
            "page": await extract(request, "page", ValueKind.UINT),
        },
    )
    return sink.to_response()


async def whoami(request: Request) -> Response:
    sink = BufferedResponse()
    try:
        token = bearer_token(request)
    except InvalidAuthorizationHeaderException as exc:
        text_unauthorized(sink, exc.message)
    else:
        text_ok(sink, token)
    return sink.to_response()


async def create_order(request: Request) -> Response:
    sink = BufferedResponse()
    try:
        order = await decode_body(request, Order)
    except HttpHelpersException as exc:
        json_bad_request(sink, {"message": exc.message, "code": exc.code})
    else:
        json_ok(sink, order)
    return sink.to_response()


async def upload(request: Request) -> Response:
    sink = BufferedResponse()
    try:
        saved = await upload_file_to_dir(
            "file",
            request,
            request.app.state.upload_dir,
            "{{randomString}}{{ext}}",
            with_random_string_size(8),
            with_max_file_size(64),
        )
    except FileTooLargeException as exc:
        json_error_message(sink, 413, exc.message)
    else:
        json_ok(sink, {"saved_file": saved.saved_file, "size": saved.size})
    return sink.to_response()


async def export(request: Request) -> Response:
    sink = BufferedResponse()
    download_csv(sink, "export.csv", b"a,b\n1,2\n")
    return sink.to_response()


@pytest.fixture
def client(tmp_path):
    app = Starlette(
        routes=[
            Route("/items/{item_id:int}", show_item),
            Route("/whoami", whoami),
            Route("/orders", create_order, methods=["POST"]),
            Route("/upload", upload, methods=["POST"]),
            Route("/export", export),
        ]
    )
    app.state.upload_dir = tmp_path
    return TestClient(app)


class TestExtractionEndpoint:
    def test_path_and_query_values(self, client):
        response = client.get("/items/42", params=[("tag", "a"), ("tag", "b"), ("page", "2")])
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"item_id": 42, "tags": ["a", "b"], "page": 2}

    def test_invalid_query_value_is_zero(self, client):
        response = client.get("/items/1", params={"page": "-3"})
        assert response.json()["page"] == 0


class TestBearerEndpoint:
    def test_valid_token(self, client):
        response = client.get("/whoami", headers={"Authorization": "Bearer abc123"})
        assert response.status_code == 200
        assert response.text == "abc123"

    def test_missing_token(self, client):
        response = client.get("/whoami")
        assert response.status_code == 401
        assert response.text == "invalid bearer authorization header"


class TestDecodeEndpoint:
    def test_json_body(self, client):
        response = client.post("/orders", json={"sku": "A-1", "quantity": 3})
        assert response.json() == {"sku": "A-1", "quantity": 3}

    def test_xml_body(self, client):
        response = client.post(
            "/orders",
            content="<order><sku>B-2</sku><quantity>5</quantity></order>",
            headers={"Content-Type": "application/xml"},
        )
        assert response.json() == {"sku": "B-2", "quantity": 5}

    def test_unsupported_content_type(self, client):
        response = client.post("/orders", content="sku=A", headers={"Content-Type": "text/plain"})
        assert response.status_code == 400
        assert response.json()["message"] == "unsupported content type: text/plain"


class TestUploadEndpoint:
    def test_upload_saved(self, client, tmp_path):
        response = client.post("/upload", files={"file": ("report.csv", b"x,y\n", "text/csv")})
        body = response.json()

        assert response.status_code == 200
        assert body["size"] == 4
        assert body["saved_file"].endswith(".csv")
        assert len(body["saved_file"]) == 8 + len(".csv")
        assert (tmp_path / body["saved_file"]).read_bytes() == b"x,y\n"

    def test_upload_too_large(self, client, tmp_path):
        response = client.post("/upload", files={"file": ("big.bin", b"0" * 65, "application/octet-stream")})
        assert response.status_code == 413
        assert "exceeds the limit of 64 bytes" in response.json()["message"]
        assert list(tmp_path.iterdir()) == []


class TestDownloadEndpoint:
    def test_csv_attachment(self, client):
        response = client.get("/export")
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="export.csv"'
        assert response.headers["content-type"] == "text/csv"
        assert response.headers["content-length"] == "8"
        assert response.content == b"a,b\n1,2\n"
