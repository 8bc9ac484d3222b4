"""Tests for recurring and fixed deposit maturity."""

import pytest

from app.domain.services.deposits import calculate_fd, calculate_rd


class TestRecurringDeposit:

    def test_quarterly_compounding_formula(self):
        result = calculate_rd(1000, 8, 12)
        expected = sum(1000 * 1.02 ** ((12 - j + 1) / 3) for j in range(1, 13))
        assert result.maturity_amount == pytest.approx(expected)
        assert result.total_deposit == 12000
        assert result.interest_earned == pytest.approx(expected - 12000)

    def test_senior_citizen_bonus(self):
        result = calculate_rd(1000, 8, 12, senior_citizen=True)
        assert result.interest_rate == 8.5

    def test_quarterly_rows(self):
        result = calculate_rd(1000, 8, 12)
        assert len(result.quarterly) == 4
        assert result.quarterly[0].from_month == 1
        assert result.quarterly[0].to_month == 3
        assert result.quarterly[-1].value == pytest.approx(result.maturity_amount)

    def test_partial_last_quarter(self):
        result = calculate_rd(1000, 8, 10)
        assert result.quarterly[-1].deposit == 1000
        assert result.quarterly[-1].total_deposit == 10000

    def test_invalid_input(self):
        with pytest.raises(ValueError):
            calculate_rd(1000, 8, 0)


class TestFixedDeposit:

    def test_quarterly(self):
        result = calculate_fd(100000, 7, tenure_years=1, compounding="quarterly")
        assert result.maturity_amount == pytest.approx(100000 * 1.0175 ** 4)

    def test_simple_interest(self):
        result = calculate_fd(100000, 7, tenure_years=1, compounding="simple")
        assert result.maturity_amount == pytest.approx(107000)

    def test_tds_when_requested(self):
        result = calculate_fd(1000000, 8, tenure_years=1, compounding="yearly", apply_tds=True)
        assert result.tds_applicable is True
        assert result.tds_amount == pytest.approx(8000)
        assert result.maturity_after_tds == pytest.approx(1072000)

    def test_no_tds_by_default(self):
        result = calculate_fd(1000000, 8, tenure_years=1, compounding="yearly")
        assert result.tds_amount == 0
        assert result.maturity_after_tds == result.maturity_amount

    def test_senior_threshold_is_higher(self):
        result = calculate_fd(600000, 7.5, tenure_years=1, compounding="yearly", senior_citizen=True, apply_tds=True)
        # 48,000 of interest is below the 50,000 senior threshold
        assert result.tds_applicable is False

    def test_partial_year_row(self):
        result = calculate_fd(100000, 7, tenure_years=1, tenure_months=6)
        assert [(y.year, y.months) for y in result.yearly] == [(1, 12), (2, 6)]
        assert result.yearly[-1].closing_balance == pytest.approx(result.maturity_amount)

    def test_zero_tenure_rejected(self):
        with pytest.raises(ValueError):
            calculate_fd(100000, 7)

    def test_unknown_compounding(self):
        with pytest.raises(ValueError):
            calculate_fd(100000, 7, tenure_years=1, compounding="daily")
