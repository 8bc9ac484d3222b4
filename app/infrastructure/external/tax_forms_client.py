# app/infrastructure/external/tax_forms_client.py
"""
Client for the tax-forms backend (``GET /api/tax-forms/{id}``).

The backend owns authentication; the caller's Authorization header is
forwarded unchanged.
"""

import logging

import httpx

from app.core.config import settings

logger = logging.getLogger("tax_forms_client")


class TaxFormsClientError(Exception):
    """Raised when the tax-forms backend returns an error or is unreachable."""

    def __init__(self, message: str, status_code: int = 0, response: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response or {}


class TaxFormsClient:
    def __init__(self, authorization: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        if not settings.TAX_FORMS_API_BASE_URL:
            raise RuntimeError("Tax-forms backend not configured")
        self.base_url = settings.TAX_FORMS_API_BASE_URL.rstrip("/")
        self.timeout = settings.TAX_FORMS_API_TIMEOUT
        self.authorization = authorization
        self._transport = transport

    @classmethod
    def is_configured(cls) -> bool:
        return bool(settings.TAX_FORMS_API_BASE_URL)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.authorization:
            headers["Authorization"] = self.authorization
        return headers

    async def get_tax_form(self, form_id: str) -> dict:
        """Fetch one tax-form record."""
        url = f"{self.base_url}/api/tax-forms/{form_id}"
        logger.info("Fetching tax form %s", form_id)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.get(url, headers=self._headers())
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                body = {}
                try:
                    body = exc.response.json()
                except ValueError:
                    pass
                raise TaxFormsClientError(
                    f"Fetching tax form {form_id} failed: {exc.response.status_code}",
                    status_code=exc.response.status_code,
                    response=body,
                ) from exc
            except httpx.RequestError as exc:
                raise TaxFormsClientError(f"Tax-forms backend unreachable: {exc}") from exc

        try:
            form = resp.json()
        except ValueError as exc:
            raise TaxFormsClientError(f"Tax form {form_id}: backend returned invalid JSON") from exc
        if not isinstance(form, dict):
            raise TaxFormsClientError(f"Tax form {form_id}: expected a JSON object, got {type(form).__name__}")
        return form
