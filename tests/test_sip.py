"""Tests for SIP and lumpsum projections."""

import pytest

from app.domain.services.sip import calculate_lumpsum, calculate_sip, sip_future_value


def _closed_form(m, rate, years):
    i = rate / 12 / 100
    n = years * 12
    return m * ((1 + i) ** n - 1) / i * (1 + i)


class TestSip:

    def test_matches_annuity_due_formula(self):
        result = calculate_sip(5000, 12, 10)
        assert result.maturity_value == pytest.approx(_closed_form(5000, 12, 10))
        assert result.total_invested == 600000
        assert result.estimated_returns == pytest.approx(result.maturity_value - 600000)

    def test_zero_rate(self):
        assert sip_future_value(1000, 0, 24) == 24000

    def test_monotonic_in_contribution(self):
        values = [calculate_sip(m, 12, 10).maturity_value for m in (1000, 2000, 5000)]
        assert values == sorted(values)

    def test_monotonic_in_rate(self):
        values = [calculate_sip(5000, r, 10).maturity_value for r in (0, 6, 12, 18)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_monotonic_in_tenure(self):
        result = calculate_sip(5000, 12, 20)
        values = [y.estimated_value for y in result.yearly]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_step_up_exceeds_flat(self):
        flat = calculate_sip(5000, 12, 10)
        stepped = calculate_sip(5000, 12, 10, annual_step_up=10)
        assert stepped.maturity_value > flat.maturity_value
        assert stepped.total_invested > flat.total_invested

    def test_step_up_first_year_matches_flat(self):
        flat = calculate_sip(5000, 12, 1)
        stepped = calculate_sip(5000, 12, 1, annual_step_up=10)
        assert stepped.maturity_value == pytest.approx(flat.maturity_value)

    def test_invalid_input(self):
        with pytest.raises(ValueError):
            calculate_sip(0, 12, 10)


class TestLumpsum:

    def test_annual_compounding(self):
        result = calculate_lumpsum(100000, 12, 10)
        assert result.maturity_value == pytest.approx(100000 * 1.12 ** 10)
        assert len(result.yearly) == 10

    def test_invalid_input(self):
        with pytest.raises(ValueError):
            calculate_lumpsum(100000, -1, 10)
