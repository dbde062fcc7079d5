"""
Invoice calculation endpoints.

POST /api/invoices/calculate: raw CalculationResult
POST /api/invoices/validate:  advisory error list
POST /api/invoices/preview:   totals plus display strings, for the editor

Nothing is stored here. The editor posts the whole document each time.
"""

import logging

from fastapi import APIRouter

from ..calculations import (
    compute_invoice,
    format_currency,
    format_square_foot,
    is_retail,
    validate_document,
)
from ..models import DocumentType
from ..schemas import CalculationResult, InvoiceDocument, ValidationReport

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

TOTAL_FIELDS = ["subtotal", "discount", "subtotal_after_discount", "sales_tax", "total_due"]


@router.post("/calculate", response_model=CalculationResult)
def calculate(document: InvoiceDocument):
    return compute_invoice(document)


@router.post("/validate", response_model=ValidationReport)
def validate(document: InvoiceDocument):
    errors = validate_document(document)
    if errors:
        logger.info(f"Invoice {document.invoice_number or '(unnumbered)'} has {len(errors)} validation error(s)")
    return ValidationReport(valid=not errors, errors=errors)


@router.post("/preview")
def preview(document: InvoiceDocument):
    """
    Everything the editor and print template need in one call.

    Numbers stay unrounded; every number gets a matching *_display string.
    """
    result = compute_invoice(document)
    errors = validate_document(document)

    items = []
    for item in result.items:
        row = item.model_dump(mode="json")
        row["square_foot_display"] = format_square_foot(item.square_foot)
        row["amount_display"] = format_currency(item.amount)
        items.append(row)

    totals = {}
    for field in TOTAL_FIELDS:
        value = getattr(result, field)
        totals[field] = value
        totals[f"{field}_display"] = format_currency(value)

    retail = is_retail(document.mode)
    return {
        "invoice_number": document.invoice_number,
        "document_type": document.document_type.value,
        "mode": document.mode.value,
        "items": items,
        "totals": totals,
        "show_discount": retail and result.discount > 0,
        "show_sales_tax": retail and document.document_type != DocumentType.CONSIGNMENT,
        "valid": not errors,
        "errors": errors,
    }
