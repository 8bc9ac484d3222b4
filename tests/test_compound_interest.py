"""Tests for the compound interest calculator."""

import pytest

from app.domain.services.compound_interest import COMPOUNDING_PERIODS, calculate_compound_interest


class TestClosedForm:

    @pytest.mark.parametrize("compounding", list(COMPOUNDING_PERIODS))
    def test_matches_formula(self, compounding):
        n = COMPOUNDING_PERIODS[compounding]
        result = calculate_compound_interest(100000, 8, 10, compounding)
        expected = 100000 * (1 + 0.08 / n) ** (n * 10)
        assert result.maturity_amount == pytest.approx(expected, rel=1e-9)
        assert result.total_interest == pytest.approx(expected - 100000, rel=1e-9)

    def test_zero_rate(self):
        result = calculate_compound_interest(50000, 0, 5)
        assert result.maturity_amount == 50000
        assert result.total_interest == 0

    def test_one_row_per_year(self):
        result = calculate_compound_interest(1000, 5, 7, "monthly")
        assert [y.year for y in result.yearly] == list(range(1, 8))
        assert result.yearly[-1].balance == result.maturity_amount


class TestContributions:

    def test_yearly_contribution_before_interest(self):
        result = calculate_compound_interest(0, 10, 2, "annually", 10000, "yearly")
        assert result.total_contributions == 20000
        assert result.maturity_amount == pytest.approx(23100)

    def test_monthly_contributions_with_quarterly_compounding(self):
        result = calculate_compound_interest(0, 8, 1, "quarterly", 1000, "monthly")
        assert result.total_contributions == 12000
        # Three instalments credited at the start of each quarter
        q = 1.02
        expected = 3000 * (q ** 4 + q ** 3 + q ** 2 + q)
        assert result.maturity_amount == pytest.approx(expected)

    def test_principal_counted_in_contributions(self):
        result = calculate_compound_interest(5000, 6, 3, "annually", 1000, "yearly")
        assert result.total_contributions == 8000


class TestValidation:

    def test_negative_principal(self):
        with pytest.raises(ValueError):
            calculate_compound_interest(-1, 5, 1)

    def test_zero_years(self):
        with pytest.raises(ValueError):
            calculate_compound_interest(1000, 5, 0)

    def test_unknown_frequency(self):
        with pytest.raises(ValueError, match="Unsupported frequency"):
            calculate_compound_interest(1000, 5, 1, "weekly")
