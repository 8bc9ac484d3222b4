"""Tests for the tax-forms backend client (httpx.MockTransport, no network)."""

import httpx
import pytest

from app.core.config import settings
from app.infrastructure.external.tax_forms_client import TaxFormsClient, TaxFormsClientError


@pytest.fixture
def backend_url(monkeypatch):
    monkeypatch.setattr(settings, "TAX_FORMS_API_BASE_URL", "http://backend.test/")
    return "http://backend.test"


class TestTaxFormsClient:

    def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "TAX_FORMS_API_BASE_URL", "")
        assert TaxFormsClient.is_configured() is False
        with pytest.raises(RuntimeError):
            TaxFormsClient()

    def test_fetch_forwards_authorization(self, backend_url, event_loop, sample_tax_form):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=sample_tax_form)

        client = TaxFormsClient(authorization="Bearer abc", transport=httpx.MockTransport(handler))
        form = event_loop.run_until_complete(client.get_tax_form("tf-101"))

        assert form["id"] == "tf-101"
        assert seen["url"] == f"{backend_url}/api/tax-forms/tf-101"
        assert seen["auth"] == "Bearer abc"

    def test_no_authorization_header_when_absent(self, backend_url, event_loop):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={})

        client = TaxFormsClient(transport=httpx.MockTransport(handler))
        event_loop.run_until_complete(client.get_tax_form("tf-1"))
        assert seen["auth"] is None

    def test_http_error_maps_status(self, backend_url, event_loop):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Tax form not found"})

        client = TaxFormsClient(transport=httpx.MockTransport(handler))
        with pytest.raises(TaxFormsClientError) as exc_info:
            event_loop.run_until_complete(client.get_tax_form("missing"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.response == {"message": "Tax form not found"}

    def test_connection_error(self, backend_url, event_loop):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = TaxFormsClient(transport=httpx.MockTransport(handler))
        with pytest.raises(TaxFormsClientError) as exc_info:
            event_loop.run_until_complete(client.get_tax_form("tf-1"))

        assert exc_info.value.status_code == 0

    def test_non_json_body(self, backend_url, event_loop):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>", headers={"Content-Type": "text/html"})

        client = TaxFormsClient(transport=httpx.MockTransport(handler))
        with pytest.raises(TaxFormsClientError) as exc_info:
            event_loop.run_until_complete(client.get_tax_form("tf-1"))

        assert "invalid JSON" in str(exc_info.value)

    def test_non_object_body(self, backend_url, event_loop):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"id": "tf-1"}])

        client = TaxFormsClient(transport=httpx.MockTransport(handler))
        with pytest.raises(TaxFormsClientError):
            event_loop.run_until_complete(client.get_tax_form("tf-1"))
