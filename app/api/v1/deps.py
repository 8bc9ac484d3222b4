# app/api/v1/deps.py
"""
FastAPI dependencies for the v1 API layer.

``get_tax_forms_client`` builds a :class:`TaxFormsClient` that forwards the
caller's ``Authorization`` header to the tax-forms backend.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException, status

from app.core.config import settings
from app.infrastructure.external.tax_forms_client import TaxFormsClient

logger = logging.getLogger("api.v1.deps")


def resolve_assessment_year(assessment_year: str | None) -> str:
    """Fall back to the configured default assessment year."""
    return assessment_year or settings.DEFAULT_ASSESSMENT_YEAR


async def get_tax_forms_client(authorization: str | None = Header(None)) -> TaxFormsClient:
    """
    FastAPI dependency returning a client for the tax-forms backend.

    Raises HTTP 503 if the backend URL is not configured.
    """
    if not TaxFormsClient.is_configured():
        logger.warning("Tax-forms backend requested but TAX_FORMS_API_BASE_URL is not set")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Tax-forms backend is not configured",
        )
    return TaxFormsClient(authorization=authorization)
