"""
Invoice calculation engine.

Turns raw rug geometry and the document's pricing mode into taxed totals.
Pure math. No I/O, no state, no rounding until display.

Input: InvoiceDocument (never mutated)
Output: CalculationResult

Order of operations in compute_invoice is fixed:
    line amounts → subtotal → discount → subtotal after discount
    → sales tax → total due
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Union

from .models import DocumentType, InvoiceMode, RugShape
from .schemas import CalculatedItem, CalculationResult, InvoiceDocument, LineItem

SALES_TAX_RATE = 0.06  # 6%, retail invoices only
INCHES_PER_FOOT = 12.0
CENTS = Decimal("0.01")


def _number_or_zero(value: Optional[float]) -> float:
    """None and NaN count as 0, the same as a blank form field."""
    if value is None or math.isnan(value):
        return 0
    return value


def _mode_value(mode: Union[InvoiceMode, str]) -> str:
    return getattr(mode, "value", mode)


def is_retail(mode: Union[InvoiceMode, str]) -> bool:
    """Retail modes get the discount and sales tax; wholesale modes get neither."""
    return _mode_value(mode).startswith("retail")


def is_per_sqft(mode: Union[InvoiceMode, str]) -> bool:
    """Per-sqft modes price by area × price_per_sq_ft instead of fixed_price."""
    return _mode_value(mode).endswith("per-sqft")


def to_decimal_feet(feet: float, inches: float) -> float:
    """10 ft 6 in → 10.5"""
    return feet + inches / INCHES_PER_FOOT


def compute_area(width_feet: float, width_inches: float,
                 length_feet: float, length_inches: float,
                 shape: Union[RugShape, str] = RugShape.RECTANGLE) -> float:
    """
    Square footage of one rug.

    Rectangle: (width_ft + width_in/12) × (length_ft + length_in/12)
    Round: π × (diameter/2)², diameter read from the WIDTH fields.
    Length is ignored entirely for round rugs.

    Negative or degenerate input is not rejected; it flows through.
    """
    width = to_decimal_feet(width_feet, width_inches)

    if shape == RugShape.ROUND:
        radius = width / 2
        return math.pi * radius * radius

    length = to_decimal_feet(length_feet, length_inches)
    return width * length


def compute_line_amount(item: LineItem, mode: Union[InvoiceMode, str]) -> float:
    """
    Monetary amount for one line item.

    Missing or NaN prices count as 0; validate_document is where they get flagged.
    """
    if is_per_sqft(mode):
        square_foot = compute_area(
            item.width_feet, item.width_inches,
            item.length_feet, item.length_inches,
            item.shape,
        )
        return square_foot * _number_or_zero(item.price_per_sq_ft)

    return _number_or_zero(item.fixed_price)


def compute_invoice(document: InvoiceDocument) -> CalculationResult:
    """
    Full calculation for a document.

    Discount applies only in retail modes with a non-zero percentage.
    Sales tax applies only in retail modes and never to consignments,
    and is taken on the discounted subtotal.
    """
    retail = is_retail(document.mode)
    consignment = document.document_type == DocumentType.CONSIGNMENT

    # --- Line items (input order preserved) ---
    items = []
    for item in document.items:
        square_foot = compute_area(
            item.width_feet, item.width_inches,
            item.length_feet, item.length_inches,
            item.shape,
        )
        amount = compute_line_amount(item, document.mode)
        items.append(CalculatedItem(**item.model_dump(), square_foot=square_foot, amount=amount))

    subtotal = sum((item.amount for item in items), 0.0)

    discount = 0.0
    discount_percentage = _number_or_zero(document.discount_percentage)
    if retail and discount_percentage:
        discount = subtotal * (discount_percentage / 100)

    subtotal_after_discount = subtotal - discount

    sales_tax = 0.0
    if retail and not consignment:
        sales_tax = subtotal_after_discount * SALES_TAX_RATE

    total_due = subtotal_after_discount + sales_tax

    return CalculationResult(
        items=items,
        subtotal=subtotal,
        discount=discount,
        subtotal_after_discount=subtotal_after_discount,
        sales_tax=sales_tax,
        total_due=total_due,
    )


def validate_document(document: InvoiceDocument) -> List[str]:
    """
    Human-readable problems with a document, in check order.
    Empty list means valid. Never raises; the caller decides what to do.
    """
    errors = []

    if not document.invoice_number.strip():
        errors.append("Invoice number is required")

    if not document.date:
        errors.append("Invoice date is required")

    if not document.sold_to.name.strip():
        errors.append("Customer name is required")

    if len(document.items) == 0:
        errors.append("At least one item is required")

    per_sqft = is_per_sqft(document.mode)
    for index, item in enumerate(document.items, start=1):
        if not item.sku.strip():
            errors.append(f"Item {index}: SKU is required")
        if not item.description.strip():
            errors.append(f"Item {index}: Description is required")

        if per_sqft and (item.price_per_sq_ft is None or item.price_per_sq_ft < 0):
            errors.append(f"Item {index}: Valid price per sq.ft is required")
        if not per_sqft and (item.fixed_price is None or item.fixed_price < 0):
            errors.append(f"Item {index}: Valid fixed price is required")

    return errors


# --- Display formatting (never fed back into calculations) ---

def _round_cents(value: Decimal) -> Decimal:
    """Half-up, away from zero on ties: 1.125 → 1.13, -1.125 → -1.13."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """
    1234.5 → "$1,234.50", -5 → "-$5.00".

    Rounds the shortest decimal form of the float half-up, so 2.675 → "$2.68".
    """
    if not math.isfinite(amount):
        return f"${amount}"
    cents = _round_cents(Decimal(repr(float(amount))))
    if amount < 0:
        return f"-${-cents:,.2f}"
    return f"${cents:,.2f}"


def format_square_foot(sqft: float) -> str:
    """Fixed two decimals, no unit. Exact binary ties round up: 1.125 → "1.13"."""
    if not math.isfinite(sqft):
        return f"{sqft}"
    return f"{_round_cents(Decimal(float(sqft))):.2f}"
