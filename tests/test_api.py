"""HTTP-level tests for the calculator API."""

import httpx
import pytest
from fastapi import Header

from app.api.v1.deps import get_tax_forms_client
from app.core.config import settings
from app.infrastructure.external.tax_forms_client import TaxFormsClient


class TestHealth:

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestCatalog:

    def test_lists_all(self, client):
        resp = client.get("/api/v1/calculators")
        body = resp.json()
        assert body["status"] == "ok"
        slugs = {c["slug"] for c in body["data"]}
        assert {"sip", "ppf", "gratuity", "hra", "income-tax", "epf", "take-home-salary", "gst"} <= slugs

    def test_category_filter(self, client):
        resp = client.get("/api/v1/calculators", params={"category": "loans"})
        assert {c["category"] for c in resp.json()["data"]} == {"loans"}


@pytest.mark.parametrize(
    ("path", "payload"),
    [
        ("compound-interest", {"principal": 100000, "annual_rate": 8, "years": 5, "compounding": "quarterly"}),
        ("sip", {"monthly_investment": 5000, "annual_rate": 12, "years": 10}),
        ("lumpsum", {"amount": 100000, "annual_rate": 12, "years": 10}),
        ("ppf", {"initial_deposit": 150000, "yearly_deposit": 150000}),
        ("rd", {"monthly_deposit": 5000, "annual_rate": 6.5, "tenure_months": 24}),
        ("fd", {"principal": 100000, "annual_rate": 7, "tenure_years": 2}),
        ("nps", {"current_age": 30, "retirement_age": 60, "monthly_contribution": 5000}),
        ("retirement", {"current_age": 30, "retirement_age": 60, "monthly_expenses": 50000}),
        ("loan-emi", {"principal": 1000000, "annual_rate": 10, "tenure_years": 5}),
        ("home-loan", {"principal": 5000000, "annual_rate": 8.5, "tenure_years": 20}),
        ("car-loan", {"principal": 800000, "annual_rate": 9, "tenure_years": 5}),
        ("personal-loan", {"principal": 300000, "annual_rate": 14, "tenure_years": 3}),
        ("education-loan", {"principal": 1500000, "annual_rate": 9.5, "tenure_years": 10}),
        ("lap", {"property_value": 5000000, "monthly_income": 100000}),
        ("gratuity", {"employee_type": "covered", "service_years": 10, "service_months": 7}),
        ("hra", {"basic_salary": 50000, "hra_received": 20000, "rent_paid": 15000, "metro": True}),
        ("tds", {"payment_type": "professional_fees", "amount": 50000}),
        ("epf", {"basic_salary": 30000, "years_of_service": 10}),
        ("take-home-salary", {"gross_salary": 1200000, "regime": "old", "rent_paid": 180000}),
        ("gst", {"amount": 1180, "gst_rate": 18, "inclusive": True}),
        ("advance-tax", {"estimated_taxable_income": 1500000}),
        ("capital-gains", {
            "asset_type": "equity", "purchase_date": "2022-01-01", "sale_date": "2024-01-01",
            "purchase_price": 100000, "sale_price": 250000,
        }),
    ],
)
def test_calculator_endpoints(client, path, payload):
    resp = client.post(f"/api/v1/calculators/{path}", json=payload)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["status"] == "ok"
    assert body["data"]


class TestCalculatorResults:

    def test_hra_amounts(self, client):
        resp = client.post("/api/v1/calculators/hra", json={
            "basic_salary": 50000, "hra_received": 20000, "rent_paid": 15000, "metro": True,
        })
        data = resp.json()["data"]
        assert data["exemption"] == 120000
        assert data["taxable_hra"] == 120000

    def test_money_rounded_to_paise(self, client):
        resp = client.post("/api/v1/calculators/sip", json={"monthly_investment": 5000, "annual_rate": 12, "years": 10})
        value = resp.json()["data"]["maturity_value"]
        assert round(value, 2) == value

    def test_ppf_clamp_message(self, client):
        resp = client.post("/api/v1/calculators/ppf", json={"initial_deposit": 200000, "yearly_deposit": 150000})
        body = resp.json()
        assert body["data"]["clamped"] is True
        assert body["message"]

    def test_advance_tax_not_required_message(self, client):
        resp = client.post("/api/v1/calculators/advance-tax", json={"estimated_taxable_income": 500000})
        body = resp.json()
        assert body["data"]["advance_tax_required"] is False
        assert "not required" in body["message"]

    def test_gst_inclusive(self, client):
        resp = client.post("/api/v1/calculators/gst", json={"amount": 1180, "gst_rate": 18, "inclusive": True})
        data = resp.json()["data"]
        assert data["net_amount"] == 1000
        assert data["cgst"] == 90

    def test_take_home_monthly(self, client):
        resp = client.post("/api/v1/calculators/take-home-salary", json={
            "gross_salary": 1000000, "regime": "new", "assessment_year": "2025-26",
        })
        data = resp.json()["data"]
        assert data["take_home_monthly"] == 74450

    def test_tds_senior_interest(self, client):
        resp = client.post("/api/v1/calculators/tds", json={
            "payment_type": "interest", "amount": 45000, "senior_citizen": True,
        })
        assert resp.json()["data"]["tds_amount"] == 0


class TestErrors:

    def test_schema_validation(self, client):
        resp = client.post("/api/v1/calculators/sip", json={"monthly_investment": -5})
        assert resp.status_code == 422
        body = resp.json()
        assert body["status"] == "error"
        assert body["errors"][0]["loc"][-1] == "monthly_investment"

    def test_domain_value_error(self, client):
        resp = client.post("/api/v1/calculators/ppf", json={"years": 16})
        assert resp.status_code == 422
        assert "blocks of 5" in resp.json()["message"]

    def test_product_limit(self, client):
        resp = client.post("/api/v1/calculators/personal-loan", json={"principal": 2000000, "tenure_years": 3})
        assert resp.status_code == 422
        assert "cannot exceed" in resp.json()["message"]

    def test_epf_retirement_age(self, client):
        resp = client.post("/api/v1/calculators/epf", json={"current_age": 50, "retirement_age": 45})
        assert resp.status_code == 422

    def test_capital_gains_date_order(self, client):
        resp = client.post("/api/v1/calculators/capital-gains", json={
            "purchase_date": "2024-01-01", "sale_date": "2023-01-01",
            "purchase_price": 1, "sale_price": 2,
        })
        assert resp.status_code == 422

    def test_unknown_route(self, client):
        resp = client.get("/api/v1/nope")
        assert resp.status_code == 404
        assert resp.json()["status"] == "error"


class TestIncomeTax:

    def test_compute(self, client):
        resp = client.post("/api/v1/income-tax/compute", json={
            "assessment_year": "2025-26", "regime": "old", "other_income": 1500000,
        })
        data = resp.json()["data"]
        assert data["total_tax_liability"] == 273000
        assert data["regime"] == "old"

    def test_default_assessment_year(self, client):
        resp = client.post("/api/v1/income-tax/compute", json={"salary_income": 1000000})
        assert resp.json()["data"]["assessment_year"] == settings.DEFAULT_ASSESSMENT_YEAR

    def test_compare(self, client):
        resp = client.post("/api/v1/income-tax/compare", json={
            "assessment_year": "2025-26",
            "salary_income": 1000000,
            "section_80c": 150000,
            "section_80d": 25000,
            "section_80ccd_1b": 50000,
            "section_80e": 200000,
        })
        data = resp.json()["data"]
        assert data["recommended_regime"] == "old"
        assert data["savings"] == 26000

    def test_unsupported_year(self, client):
        resp = client.post("/api/v1/income-tax/compute", json={"assessment_year": "2010-11"})
        assert resp.status_code == 422

    def test_pdf(self, client):
        resp = client.post("/api/v1/income-tax/pdf", json={"salary_income": 1200000, "name": "Asha Rao"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert "attachment" in resp.headers["content-disposition"]
        assert resp.content.startswith(b"%PDF")

    def test_rates(self, client):
        resp = client.get("/api/v1/income-tax/rates")
        assert "2025-26" in resp.json()["data"]["assessment_years"]

        resp = client.get("/api/v1/income-tax/rates/2026-27")
        data = resp.json()["data"]
        assert data["rebate_87a_new_limit"] == "1200000"
        assert data["cess_rate"] == "4"


class TestTaxFormSummary:

    @pytest.fixture
    def backend(self, client, monkeypatch, sample_tax_form):
        from app.main import app

        monkeypatch.setattr(settings, "TAX_FORMS_API_BASE_URL", "http://backend.test")

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/tf-101"):
                return httpx.Response(200, json=sample_tax_form)
            if request.url.path.endswith("/tf-html"):
                return httpx.Response(200, text="<html>oops</html>")
            if request.headers.get("Authorization") is None:
                return httpx.Response(401, json={"message": "Unauthorized"})
            return httpx.Response(404, json={"message": "Not found"})

        def override(authorization: str | None = Header(None)):
            return TaxFormsClient(authorization=authorization, transport=httpx.MockTransport(handler))

        app.dependency_overrides[get_tax_forms_client] = override
        yield client
        app.dependency_overrides.clear()

    def test_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(settings, "TAX_FORMS_API_BASE_URL", "")
        resp = client.get("/api/v1/income-tax/tax-forms/tf-101/summary")
        assert resp.status_code == 503
        assert resp.json()["status"] == "error"

    def test_summary(self, backend):
        resp = backend.get("/api/v1/income-tax/tax-forms/tf-101/summary", params={"regime": "old"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["assessment_year"] == "2024-25"
        assert data["taxable_income"] == 745000

    def test_not_found(self, backend):
        resp = backend.get(
            "/api/v1/income-tax/tax-forms/missing/summary", headers={"Authorization": "Bearer abc"},
        )
        assert resp.status_code == 404

    def test_unauthorised(self, backend):
        resp = backend.get("/api/v1/income-tax/tax-forms/missing/summary")
        assert resp.status_code == 401

    def test_invalid_regime(self, backend):
        resp = backend.get("/api/v1/income-tax/tax-forms/tf-101/summary", params={"regime": "flat"})
        assert resp.status_code == 422

    def test_malformed_backend_response(self, backend):
        resp = backend.get("/api/v1/income-tax/tax-forms/tf-html/summary")
        assert resp.status_code == 502
        assert resp.json()["status"] == "error"
