"""Tests for the NPS and retirement planners."""

import pytest

from app.domain.services.nps import calculate_nps
from app.domain.services.retirement import calculate_retirement, required_corpus
from app.domain.services.sip import sip_future_value


class TestNps:

    def test_annuity_split(self):
        result = calculate_nps(30, 60, 5000, 10)
        assert result.total_invested == 5000 * 12 * 30
        assert result.annuity_corpus == pytest.approx(result.total_corpus * 0.4)
        assert result.lump_sum == pytest.approx(result.total_corpus * 0.6)

    def test_monthly_pension(self):
        result = calculate_nps(30, 60, 5000, 10, annuity_percent=50, annuity_rate=6)
        assert result.monthly_pension == pytest.approx(result.annuity_corpus * 0.06 / 12)

    def test_zero_return(self):
        result = calculate_nps(50, 60, 1000, 0)
        assert result.total_corpus == 120000
        assert result.interest_earned == 0

    def test_yearly_rows_by_age(self):
        result = calculate_nps(55, 60, 1000, 8)
        assert [y.age for y in result.yearly] == [56, 57, 58, 59, 60]

    def test_annuity_below_minimum(self):
        with pytest.raises(ValueError):
            calculate_nps(30, 60, 5000, 10, annuity_percent=39)

    def test_retirement_before_current_age(self):
        with pytest.raises(ValueError):
            calculate_nps(60, 60, 5000, 10)


class TestRequiredCorpus:

    def test_zero_real_return(self):
        assert required_corpus(100000, 20, 6, 6) == pytest.approx(2000000)

    def test_positive_real_return_needs_less(self):
        assert required_corpus(100000, 20, 8, 6) < 2000000


class TestRetirementPlan:

    def test_additional_investment_closes_shortfall(self):
        result = calculate_retirement(30, 60, 85, 50000, 6, 12, 8)
        assert result.shortfall > 0
        top_up = sip_future_value(result.additional_monthly_investment, 12, 30 * 12)
        assert top_up == pytest.approx(result.shortfall)

    def test_no_shortfall_with_large_savings(self):
        result = calculate_retirement(30, 60, 85, 10000, 6, 12, 8, existing_savings=50000000)
        assert result.shortfall == 0
        assert result.additional_monthly_investment == 0

    def test_expenses_inflated_to_retirement(self):
        result = calculate_retirement(30, 60, 85, 50000, 6, 12, 8)
        assert result.monthly_expenses_at_retirement == pytest.approx(50000 * 1.06 ** 30)

    def test_projection_phases(self):
        result = calculate_retirement(50, 55, 60, 20000, 5, 10, 7, existing_savings=5000000)
        phases = [y.phase for y in result.projection]
        assert phases[:5] == ["accumulation"] * 5
        assert set(phases[5:]) == {"withdrawal"}

    def test_invalid_ages(self):
        with pytest.raises(ValueError):
            calculate_retirement(60, 55, 85, 50000, 6, 12, 8)
