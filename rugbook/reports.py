"""
Sales reporting and document search.

Works on whatever list of documents the caller loaded; nothing here reads
or writes storage. Every money figure comes from compute_invoice so the
report always agrees with the printed invoices.
"""

import logging
from datetime import date, datetime, time
from typing import List, Optional

from .calculations import compute_invoice
from .schemas import InvoiceDocument, SalesReport, SalesReportRow

logger = logging.getLogger(__name__)

CUSTOMER_NAME_MAX = 30


def parse_document_date(value: Optional[str]) -> Optional[datetime]:
    """
    ISO date or datetime string → naive datetime.
    Accepts the browser's toISOString() form ("...T10:00:00.000Z").
    Returns None for missing or unparseable dates.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def filter_by_date_range(documents: List[InvoiceDocument], start_date: date,
                         end_date: date) -> List[InvoiceDocument]:
    """
    Documents dated within [start_date, end_date], both days inclusive.
    Newest first. Undated documents are left out.
    """
    start = datetime.combine(start_date, time.min)
    end = datetime.combine(end_date, time.max)

    dated = []
    for doc in documents:
        when = parse_document_date(doc.date)
        if when is None:
            continue
        if start <= when <= end:
            dated.append((when, doc))

    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [doc for _, doc in dated]


def _customer_label(name: str) -> str:
    if not name:
        return "-"
    if len(name) > CUSTOMER_NAME_MAX:
        return name[:CUSTOMER_NAME_MAX] + "..."
    return name


def build_sales_report(documents: List[InvoiceDocument], start_date: date,
                       end_date: date) -> SalesReport:
    """One row per document in range, plus total sales (sum of total due)."""
    selected = filter_by_date_range(documents, start_date, end_date)

    rows = []
    total_sales = 0.0
    for doc in selected:
        total_due = compute_invoice(doc).total_due
        total_sales += total_due
        rows.append(SalesReportRow(
            date=doc.date,
            invoice_number=doc.invoice_number or "-",
            customer=_customer_label(doc.sold_to.name),
            total_due=total_due,
        ))

    logger.debug(
        f"Sales report {start_date} to {end_date}: "
        f"{len(rows)} of {len(documents)} documents, total {total_sales:.2f}"
    )

    return SalesReport(
        start_date=start_date,
        end_date=end_date,
        rows=rows,
        invoice_count=len(rows),
        total_sales=total_sales,
    )


def _matches(doc: InvoiceDocument, term: str) -> bool:
    sold_to = doc.sold_to
    fields = [
        doc.invoice_number,
        sold_to.name,
        sold_to.phone,
        sold_to.address,
        sold_to.city,
        sold_to.zip,
    ]
    if any(term in (value or "").lower() for value in fields):
        return True
    return any(item.sku and term in item.sku.lower() for item in doc.items)


def search_documents(documents: List[InvoiceDocument], query: str) -> List[InvoiceDocument]:
    """
    Case-insensitive substring search over invoice number, customer
    name/phone/address/city/zip and item SKUs. Blank query returns everything.
    """
    term = (query or "").strip().lower()
    if not term:
        return list(documents)
    return [doc for doc in documents if _matches(doc, term)]
