"""
Snippetbox: HTTP Route Tests
=============================

What:  End-to-end tests of the three routes through the real FastAPI app.
How:   HTTPX AsyncClient over ASGITransport (see conftest.test_client).

What we test:
    ✅ Exact-match root; every other unclaimed path is a plain-text 404
    ✅ /snippet status selection for good, bad, missing and repeated ids
    ✅ /snippet/create: POST → 200, anything else → 405 + Allow: POST
    ✅ Error response format and request id header
    ✅ Access log level follows the status code
    ✅ Unhandled errors become a plain-text 500 that is still logged and tagged
"""

import logging

import pytest
from httpx import AsyncClient, ASGITransport

from snippetbox.main import create_app

NOT_FOUND_BODY = "404 page not found\n"
NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]
NONSTANDARD_METHODS = ["PROPFIND", "FOO"]


class TestHome:
    """Tests for the root route."""

    @pytest.mark.asyncio
    async def test_home(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.text == "Hello from Snippetbox"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_home_ignores_method(self, test_client):
        response = await test_client.post("/")
        assert response.status_code == 200
        assert response.text == "Hello from Snippetbox"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", NONSTANDARD_METHODS)
    async def test_home_nonstandard_method(self, test_client, method):
        response = await test_client.request(method, "/")
        assert response.status_code == 200
        assert response.text == "Hello from Snippetbox"
        assert "allow" not in response.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/foo",
            "/index.html",
            "/snippet/",
            "/snippet/create/",
            "/snippet/5",
            "/docs",
            "/redoc",
            "/openapi.json",
        ],
    )
    async def test_unknown_paths_not_found(self, test_client, path):
        """No prefix matching and no trailing-slash redirects."""
        response = await test_client.get(path)
        assert response.status_code == 404
        assert response.text == NOT_FOUND_BODY
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_unknown_path_any_method(self, test_client):
        response = await test_client.delete("/foo")
        assert response.status_code == 404


class TestShowSnippet:
    """Tests for /snippet?id=N."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("snippet_id", [1, 5, 42, 9223372036854775807])
    async def test_valid_ids(self, test_client, snippet_id):
        response = await test_client.get("/snippet", params={"id": str(snippet_id)})
        assert response.status_code == 200
        assert response.text == f"Display a specific snippet with ID {snippet_id}..."

    @pytest.mark.asyncio
    async def test_explicit_plus_sign(self, test_client):
        """A literal '+' has to be percent-encoded; httpx does that for params."""
        response = await test_client.get("/snippet", params={"id": "+3"})
        assert response.status_code == 200
        assert response.text == "Display a specific snippet with ID 3..."

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw_id",
        ["-1", "0", "abc", "", " 3", "3.0", "1_000", "9223372036854775808"],
    )
    async def test_invalid_ids_not_found(self, test_client, raw_id):
        response = await test_client.get("/snippet", params={"id": raw_id})
        assert response.status_code == 404
        assert response.text == NOT_FOUND_BODY

    @pytest.mark.asyncio
    async def test_missing_id_not_found(self, test_client):
        response = await test_client.get("/snippet")
        assert response.status_code == 404
        assert response.text == NOT_FOUND_BODY

    @pytest.mark.asyncio
    async def test_repeated_id_uses_first(self, test_client):
        response = await test_client.get("/snippet", params=[("id", "2"), ("id", "x")])
        assert response.status_code == 200
        assert response.text == "Display a specific snippet with ID 2..."

    @pytest.mark.asyncio
    async def test_repeated_id_first_invalid(self, test_client):
        response = await test_client.get("/snippet", params=[("id", "x"), ("id", "2")])
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "DELETE"] + NONSTANDARD_METHODS)
    async def test_any_method_shows_snippet(self, test_client, method):
        response = await test_client.request(method, "/snippet", params={"id": "5"})
        assert response.status_code == 200
        assert response.text == "Display a specific snippet with ID 5..."


class TestCreateSnippet:
    """Tests for /snippet/create."""

    @pytest.mark.asyncio
    async def test_post_creates(self, test_client):
        response = await test_client.post("/snippet/create")
        assert response.status_code == 200
        assert response.text == "Create a new snippet..."
        assert "allow" not in response.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", NON_POST_METHODS)
    async def test_other_methods_not_allowed(self, test_client, method):
        response = await test_client.request(method, "/snippet/create")
        assert response.status_code == 405
        assert response.headers["allow"] == "POST"
        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_get_body(self, test_client):
        response = await test_client.get("/snippet/create")
        assert response.status_code == 405
        assert response.text == "Method Not Allowed\n"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", NONSTANDARD_METHODS)
    async def test_nonstandard_methods_not_allowed(self, test_client, method):
        """Unknown methods get the same 405, advertising only POST."""
        response = await test_client.request(method, "/snippet/create")
        assert response.status_code == 405
        assert response.headers["allow"] == "POST"
        assert response.text == "Method Not Allowed\n"


class TestAmbient:
    """Request id header and access logging."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/foo", headers={"X-Request-ID": "trace-123"})
        assert response.headers["x-request-id"] == "trace-123"

    @pytest.mark.asyncio
    async def test_access_log_levels(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="snippetbox.access")

        await test_client.get("/")
        await test_client.get("/snippet", params={"id": "abc"})

        records = [r for r in caplog.records if r.name == "snippetbox.access"]
        assert len(records) == 2
        assert records[0].levelno == logging.INFO
        assert records[0].status == 200
        assert records[1].levelno == logging.WARNING
        assert records[1].status == 404
        assert records[1].path == "/snippet"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_plain_500(self, caplog):
        """A crashing handler still gets a request id, an access line and one traceback."""
        app = create_app()

        async def crash(request):
            raise RuntimeError("boom")

        app.add_route("/crash", crash)
        caplog.set_level(logging.INFO)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/crash", headers={"X-Request-ID": "crash-1"})

        assert response.status_code == 500
        assert response.text == "Internal Server Error\n"
        assert response.headers["x-request-id"] == "crash-1"
        assert response.headers["x-content-type-options"] == "nosniff"

        access = [r for r in caplog.records if r.name == "snippetbox.access"]
        assert len(access) == 1
        assert access[0].levelno == logging.ERROR
        assert access[0].status == 500

        tracebacks = [r for r in caplog.records if r.exc_info]
        assert len(tracebacks) == 1
        assert "crash-1" in tracebacks[0].getMessage()
