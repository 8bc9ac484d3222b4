"""Tests for capital gains classification, indexation and tax."""

from datetime import date
from decimal import Decimal

import pytest

from app.domain.services.capital_gains import (
    calculate_capital_gains,
    financial_year,
    indexed_cost,
)


class TestHoldingPeriod:

    def test_equity_held_exactly_one_year_is_short_term(self):
        result = calculate_capital_gains(
            "equity", date(2023, 1, 1), date(2024, 1, 1),
            Decimal("100000"), Decimal("150000"), expenses=Decimal("1000"),
        )
        assert result.holding_days == 365
        assert result.gain_type == "short"
        assert result.capital_gain == Decimal("49000")
        assert result.tax == Decimal("7350")
        assert result.cess == Decimal("294")

    def test_equity_one_day_longer_is_long_term(self):
        result = calculate_capital_gains(
            "equity", date(2023, 1, 1), date(2024, 1, 2), Decimal("100000"), Decimal("150000"),
        )
        assert result.gain_type == "long"
        assert result.indexation_applied is False

    def test_property_needs_more_than_two_years(self):
        result = calculate_capital_gains(
            "property", date(2022, 6, 1), date(2024, 5, 31), Decimal("1000000"), Decimal("1200000"),
        )
        assert result.gain_type == "short"


class TestEquity:

    def test_ltcg_exemption(self):
        result = calculate_capital_gains(
            "equity", date(2020, 4, 1), date(2023, 4, 1), Decimal("100000"), Decimal("350000"),
        )
        assert result.capital_gain == Decimal("250000")
        assert result.taxable_gain == Decimal("150000")
        assert result.tax == Decimal("15000")

    def test_loss_is_not_taxed(self):
        result = calculate_capital_gains(
            "equity", date(2023, 1, 1), date(2023, 6, 1), Decimal("100000"), Decimal("80000"),
        )
        assert result.capital_gain == Decimal("0")
        assert result.total_tax == Decimal("0")


class TestIndexation:

    def test_property_long_term(self):
        result = calculate_capital_gains(
            "property", date(2015, 6, 1), date(2023, 6, 1), Decimal("1000000"), Decimal("2000000"),
        )
        assert result.purchase_fy == "2015-16"
        assert result.sale_fy == "2023-24"
        assert result.indexation_applied is True
        assert result.cost_of_acquisition == Decimal("1370079")
        assert result.capital_gain == Decimal("629921")
        assert result.tax_rate == Decimal("20")
        assert result.tax == Decimal("125984.2")

    def test_indexed_cost_same_year(self):
        assert indexed_cost(Decimal("500000"), "2020-21", "2020-21") == Decimal("500000")

    def test_purchase_before_base_year_rejected(self):
        with pytest.raises(ValueError, match="cost inflation index"):
            calculate_capital_gains(
                "property", date(1999, 1, 1), date(2020, 1, 1), Decimal("100000"), Decimal("900000"),
            )


class TestShortTermAtSlabRates:

    def test_marginal_rate_of_other_income(self):
        result = calculate_capital_gains(
            "debt", date(2023, 1, 1), date(2023, 12, 1), Decimal("100000"), Decimal("150000"),
            other_income=Decimal("600000"),
        )
        assert result.tax_rate == Decimal("20")
        assert result.tax == Decimal("10000")

    def test_incremental_slab_tax(self):
        result = calculate_capital_gains(
            "gold", date(2023, 1, 1), date(2023, 12, 1), Decimal("100000"), Decimal("120000"),
            other_income=Decimal("490000"), include_other_income=True,
        )
        assert result.tax_rate == Decimal("0")
        assert result.tax == Decimal("2500")

    def test_no_other_income_below_exemption(self):
        result = calculate_capital_gains(
            "debt", date(2023, 1, 1), date(2023, 12, 1), Decimal("100000"), Decimal("150000"),
        )
        assert result.tax == Decimal("0")


class TestValidation:

    def test_sale_before_purchase(self):
        with pytest.raises(ValueError):
            calculate_capital_gains(
                "equity", date(2024, 1, 1), date(2023, 1, 1), Decimal("1"), Decimal("2"),
            )

    def test_unknown_asset(self):
        with pytest.raises(ValueError):
            calculate_capital_gains(
                "crypto", date(2023, 1, 1), date(2024, 1, 1), Decimal("1"), Decimal("2"),
            )

    def test_financial_year_labels(self):
        assert financial_year(date(2024, 3, 31)) == "2023-24"
        assert financial_year(date(2024, 4, 1)) == "2024-25"
        assert financial_year(date(1999, 12, 1)) == "1999-00"
