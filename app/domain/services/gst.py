# app/domain/services/gst.py
"""GST on a supply, with the amount given either exclusive or inclusive of tax."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass
class GstResult:
    gst_rate: Decimal
    inclusive: bool
    net_amount: Decimal    # value of supply before GST
    gst_amount: Decimal
    gross_amount: Decimal  # value including GST
    cgst: Decimal
    sgst: Decimal
    igst: Decimal


def calculate_gst(
    amount: Decimal,
    gst_rate: Decimal = Decimal("18"),
    inclusive: bool = False,
    intra_state: bool = True,
) -> GstResult:
    """Split *amount* into value and GST.

    Intra-state supplies split GST equally into CGST and SGST; inter-state
    supplies carry IGST.
    """
    if amount < 0:
        raise ValueError("amount cannot be negative")
    if gst_rate < 0:
        raise ValueError("gst_rate cannot be negative")

    if inclusive:
        gross = amount
        net = amount / (1 + gst_rate / 100)
        gst = gross - net
    else:
        net = amount
        gst = amount * gst_rate / 100
        gross = net + gst

    if intra_state:
        cgst = sgst = gst / 2
        igst = ZERO
    else:
        cgst = sgst = ZERO
        igst = gst

    return GstResult(
        gst_rate=gst_rate,
        inclusive=inclusive,
        net_amount=net,
        gst_amount=gst,
        gross_amount=gross,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
    )
