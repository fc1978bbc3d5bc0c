"""
Line-item tax and invoice totals as shown on the invoice preview.

Intrastate sales (seller and buyer in the same state) split tax into
CGST + SGST; interstate sales charge IGST only.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Optional

from .data.hsn_codes import HSNLookup
from .schemas import InvoiceLineItem, InvoiceTotals, LineItemTax

logger = logging.getLogger(__name__)

INTRASTATE = "Intrastate"
INTERSTATE = "Interstate"

_ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
_TEENS = ["Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
          "Seventeen", "Eighteen", "Nineteen"]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def determine_sale_type(seller_state_code: Optional[str], buyer_state_code: Optional[str]) -> str:
    seller = (seller_state_code or "").strip()
    buyer = (buyer_state_code or "").strip()
    if not seller or not buyer:
        return INTRASTATE
    return INTRASTATE if seller == buyer else INTERSTATE


def _money(value: float) -> float:
    return round(value, 2)


def _line_amounts(item: InvoiceLineItem, sale_type: str, lookup: Optional[HSNLookup]) -> Dict[str, float]:
    """Applied rates and unrounded amounts for one line."""
    hsn = lookup.get(item.hsn_code) if (lookup is not None and item.hsn_code) else None
    if item.hsn_code and lookup is not None and hsn is None:
        logger.warning("HSN code %s not in rate table; charging 0%% unless overridden", item.hsn_code)

    cgst_rate = item.cgst_rate if item.cgst_rate is not None else (hsn.cgst if hsn else 0.0)
    sgst_rate = item.sgst_rate if item.sgst_rate is not None else (hsn.sgst if hsn else 0.0)
    igst_rate = item.igst_rate if item.igst_rate is not None else (hsn.igst if hsn else 0.0)

    if sale_type == INTERSTATE:
        cgst_rate = sgst_rate = 0.0
    else:
        igst_rate = 0.0

    taxable = item.quantity * item.rate
    return {
        "taxable_value": taxable,
        "cgst_rate": cgst_rate,
        "sgst_rate": sgst_rate,
        "igst_rate": igst_rate,
        "cgst_amount": taxable * cgst_rate / 100,
        "sgst_amount": taxable * sgst_rate / 100,
        "igst_amount": taxable * igst_rate / 100,
    }


def _to_line_tax(item: InvoiceLineItem, amounts: Dict[str, float]) -> LineItemTax:
    total = amounts["taxable_value"] + amounts["cgst_amount"] + amounts["sgst_amount"] + amounts["igst_amount"]
    return LineItemTax(
        description=item.description,
        hsn_code=item.hsn_code,
        taxable_value=_money(amounts["taxable_value"]),
        cgst_rate=amounts["cgst_rate"],
        sgst_rate=amounts["sgst_rate"],
        igst_rate=amounts["igst_rate"],
        cgst_amount=_money(amounts["cgst_amount"]),
        sgst_amount=_money(amounts["sgst_amount"]),
        igst_amount=_money(amounts["igst_amount"]),
        total_amount=_money(total),
    )


def compute_line_item(
    item: InvoiceLineItem,
    sale_type: str,
    lookup: Optional[HSNLookup] = None,
) -> LineItemTax:
    """Taxable value and tax amounts for one row of the items table."""
    return _to_line_tax(item, _line_amounts(item, sale_type, lookup))


def compute_totals(
    items: Iterable[InvoiceLineItem],
    seller_state_code: Optional[str],
    buyer_state_code: Optional[str],
    lookup: Optional[HSNLookup] = None,
) -> InvoiceTotals:
    sale_type = determine_sale_type(seller_state_code, buyer_state_code)
    items = list(items)
    raw = [_line_amounts(item, sale_type, lookup) for item in items]

    # Sums run on unrounded amounts; rounding is for display only
    taxable = sum(a["taxable_value"] for a in raw)
    cgst = sum(a["cgst_amount"] for a in raw)
    sgst = sum(a["sgst_amount"] for a in raw)
    igst = sum(a["igst_amount"] for a in raw)
    grand_total = taxable + cgst + sgst + igst

    return InvoiceTotals(
        sale_type=sale_type,
        items=[_to_line_tax(item, amounts) for item, amounts in zip(items, raw)],
        total_taxable_value=_money(taxable),
        total_cgst=_money(cgst),
        total_sgst=_money(sgst),
        total_igst=_money(igst),
        total_tax=_money(cgst + sgst + igst),
        grand_total=_money(grand_total),
        amount_in_words=amount_in_words(math.floor(grand_total)) + " Rupees Only",
    )


def amount_in_words(num: int) -> str:
    """English words with Indian grouping: 150000 -> 'One Lakh Fifty Thousand'."""
    if num < 0:
        # Discount-only invoices can total below zero
        return "Minus " + amount_in_words(-num)
    if num == 0:
        return "Zero"
    if num < 10:
        return _ONES[num]
    if num < 20:
        return _TEENS[num - 10]
    if num < 100:
        return _TENS[num // 10] + (" " + _ONES[num % 10] if num % 10 else "")
    if num < 1000:
        return _ONES[num // 100] + " Hundred" + (" " + amount_in_words(num % 100) if num % 100 else "")
    if num < 100000:
        return amount_in_words(num // 1000) + " Thousand" + (" " + amount_in_words(num % 1000) if num % 1000 else "")
    if num < 10000000:
        return amount_in_words(num // 100000) + " Lakh" + (" " + amount_in_words(num % 100000) if num % 100000 else "")
    return amount_in_words(num // 10000000) + " Crore" + (" " + amount_in_words(num % 10000000) if num % 10000000 else "")
