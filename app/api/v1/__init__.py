# app/api/v1/__init__.py
"""
Versioned API v1: aggregates all sub-routers under ``/api/v1``.

Usage in ``main.py``::

    from app.api.v1 import v1_router
    app.include_router(v1_router)
"""

from fastapi import APIRouter

from app.api.v1.routes.catalog import router as catalog_router
from app.api.v1.routes.savings import router as savings_router
from app.api.v1.routes.loans import router as loans_router
from app.api.v1.routes.salary import router as salary_router
from app.api.v1.routes.tax import router as tax_router
from app.api.v1.routes.income_tax import router as income_tax_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(catalog_router)
v1_router.include_router(savings_router)
v1_router.include_router(loans_router)
v1_router.include_router(salary_router)
v1_router.include_router(tax_router)
v1_router.include_router(income_tax_router)

__all__ = ["v1_router"]
