"""Tests for the GST calculator."""

from decimal import Decimal

import pytest

from app.domain.services.gst import calculate_gst


class TestGst:

    def test_exclusive_amount(self):
        result = calculate_gst(Decimal("1000"), Decimal("18"))
        assert result.net_amount == Decimal("1000")
        assert result.gst_amount == Decimal("180")
        assert result.gross_amount == Decimal("1180")

    def test_inclusive_amount(self):
        result = calculate_gst(Decimal("1180"), Decimal("18"), inclusive=True)
        assert result.gross_amount == Decimal("1180")
        assert result.net_amount == Decimal("1000")
        assert result.gst_amount == Decimal("180")

    def test_intra_state_split(self):
        result = calculate_gst(Decimal("1000"), Decimal("12"))
        assert result.cgst == Decimal("60")
        assert result.sgst == Decimal("60")
        assert result.igst == Decimal("0")

    def test_inter_state_igst(self):
        result = calculate_gst(Decimal("1000"), Decimal("28"), intra_state=False)
        assert result.igst == Decimal("280")
        assert result.cgst == result.sgst == Decimal("0")

    def test_zero_rate(self):
        result = calculate_gst(Decimal("500"), Decimal("0"), inclusive=True)
        assert result.gst_amount == Decimal("0")
        assert result.net_amount == Decimal("500")

    def test_negative_amount(self):
        with pytest.raises(ValueError):
            calculate_gst(Decimal("-1"))
