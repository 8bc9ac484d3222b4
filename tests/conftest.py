"""Shared test fixtures for the calculator test suite."""

import asyncio
import json
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def event_loop():
    """Use a single event loop for the entire test session."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def client() -> TestClient:
    from app.main import app

    return TestClient(app)


@pytest.fixture
def sample_income() -> dict:
    """Salaried individual with typical old-regime deductions (AY 2025-26)."""
    return {
        "assessment_year": "2025-26",
        "salary_income": Decimal("1000000"),
        "section_80c": Decimal("150000"),
        "section_80d": Decimal("25000"),
        "section_80ccd_1b": Decimal("50000"),
        "section_80e": Decimal("200000"),
    }


@pytest.fixture
def sample_tax_form() -> dict:
    """Tax-form record as returned by the backend; sections are JSON strings."""
    return {
        "id": "tf-101",
        "assessmentYear": "2024-25",
        "formType": "ITR-1",
        "personalInfo": json.dumps({"name": "Asha Rao", "dateOfBirth": "1990-05-10"}),
        "incomeData": json.dumps({
            "salaryIncome": [{"netSalary": "8,00,000"}, {"netSalary": "2,00,000"}],
            "housePropertyIncome": "-50,000",
            "interestIncome": [{"amount": "10,000"}],
            "dividendIncome": "5000",
            "otherSources": "5,000",
        }),
        "deductions80C": json.dumps({"totalAmount": "1,80,000"}),
        "deductions80D": json.dumps({"totalAmount": "30000"}),
        "otherDeductions": None,
        "taxPaid": json.dumps({"tds": "50,000"}),
    }
