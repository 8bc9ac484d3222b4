"""Tests for mapping stored tax forms onto the income-tax engine."""

from decimal import Decimal

from app.core.config import settings
from app.domain.services.tax_form_summary import (
    income_input_from_tax_form,
    parse_amount,
    summary_from_tax_form,
)


class TestParseAmount:

    def test_indian_grouping(self):
        assert parse_amount("1,50,000") == Decimal("150000")

    def test_numbers_and_blanks(self):
        assert parse_amount(2500) == Decimal("2500")
        assert parse_amount(None) == Decimal("0")
        assert parse_amount("") == Decimal("0")

    def test_garbage(self):
        assert parse_amount("n/a") == Decimal("0")


class TestIncomeInput:

    def test_heads_and_deductions(self, sample_tax_form):
        inp = income_input_from_tax_form(sample_tax_form)
        assert inp.assessment_year == "2024-25"
        assert inp.age == 33
        assert inp.salary_income == Decimal("1000000")
        assert inp.house_property_income == Decimal("-50000")
        assert inp.interest_income == Decimal("10000")
        assert inp.other_income == Decimal("10000")
        assert inp.section_80c == Decimal("180000")
        assert inp.section_80d == Decimal("30000")
        assert inp.other_deductions == Decimal("0")
        assert inp.tds == Decimal("50000")

    def test_capital_gains_fallback(self, sample_tax_form):
        sample_tax_form["incomeData"] = {"shortTermCapitalGains": "20,000", "longTermCapitalGains": "30,000"}
        inp = income_input_from_tax_form(sample_tax_form)
        assert inp.capital_gains == Decimal("50000")

    def test_invalid_json_section_is_empty(self, sample_tax_form):
        sample_tax_form["deductions80C"] = "{not json"
        inp = income_input_from_tax_form(sample_tax_form)
        assert inp.section_80c == Decimal("0")

    def test_missing_dob_and_year(self):
        inp = income_input_from_tax_form({"id": "tf-1"})
        assert inp.assessment_year == settings.DEFAULT_ASSESSMENT_YEAR
        assert inp.age == 0
        assert inp.gross_total_income == Decimal("0")


class TestSummary:

    def test_new_regime(self, sample_tax_form):
        result = summary_from_tax_form(sample_tax_form, "new")
        assert result.taxable_income == Decimal("920000")
        assert result.total_tax_liability == Decimal("49920")
        assert result.refund_due == Decimal("80")

    def test_old_regime(self, sample_tax_form):
        result = summary_from_tax_form(sample_tax_form, "old")
        assert result.taxable_income == Decimal("745000")
        assert result.total_tax_liability == Decimal("63960")
        assert result.tax_payable == Decimal("13960")
