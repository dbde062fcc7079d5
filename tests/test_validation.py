"""
Document validation tests.

Validation is advisory: a list of strings, never an exception,
and every failing check is reported (no short-circuit).
"""

from rugbook.calculations import validate_document
from rugbook.schemas import InvoiceDocument, LineItem


def _sample_item(**overrides):
    data = {
        "id": "item-1",
        "sku": "R2040",
        "description": "Kazak runner",
        "width_feet": 2,
        "width_inches": 8,
        "length_feet": 10,
        "length_inches": 2,
        "price_per_sq_ft": 12.5,
        "fixed_price": 450,
    }
    data.update(overrides)
    return LineItem(**data)


def _sample_document(items=None, **overrides):
    data = {
        "invoice_number": "MP00000017",
        "date": "2026-05-02",
        "terms": "Due on Receipt",
        "sold_to": {"name": "Sam Rivera", "city": "Alexandria", "state": "VA"},
        "items": items if items is not None else [_sample_item()],
        "mode": "retail-per-rug",
    }
    data.update(overrides)
    return InvoiceDocument(**data)


def test_complete_document_is_valid():
    assert validate_document(_sample_document()) == []


def test_missing_date_and_sku_both_reported():
    doc = _sample_document(date=None, items=[_sample_item(sku="")])
    errors = validate_document(doc)
    assert len(errors) >= 2
    assert any("date" in e for e in errors)
    assert any("Item 1" in e and "SKU" in e for e in errors)


def test_header_checks_in_order():
    doc = InvoiceDocument(invoice_number="   ", sold_to={"name": "  "}, items=[])
    assert validate_document(doc) == [
        "Invoice number is required",
        "Invoice date is required",
        "Customer name is required",
        "At least one item is required",
    ]


def test_empty_date_string_is_missing():
    errors = validate_document(_sample_document(date=""))
    assert errors == ["Invoice date is required"]


def test_each_item_labeled_by_position():
    items = [
        _sample_item(id="1"),
        _sample_item(id="2", description=" "),
        _sample_item(id="3", sku="", fixed_price=None),
    ]
    errors = validate_document(_sample_document(items=items))
    assert errors == [
        "Item 2: Description is required",
        "Item 3: SKU is required",
        "Item 3: Valid fixed price is required",
    ]


def test_per_sqft_mode_checks_price_per_sqft_only():
    items = [_sample_item(price_per_sq_ft=None, fixed_price=None)]
    errors = validate_document(_sample_document(items=items, mode="wholesale-per-sqft"))
    assert errors == ["Item 1: Valid price per sq.ft is required"]


def test_per_rug_mode_checks_fixed_price_only():
    items = [_sample_item(price_per_sq_ft=None, fixed_price=100)]
    assert validate_document(_sample_document(items=items, mode="wholesale-per-rug")) == []


def test_negative_prices_rejected():
    errors = validate_document(_sample_document(
        items=[_sample_item(price_per_sq_ft=-1)], mode="retail-per-sqft",
    ))
    assert errors == ["Item 1: Valid price per sq.ft is required"]

    errors = validate_document(_sample_document(items=[_sample_item(fixed_price=-0.01)]))
    assert errors == ["Item 1: Valid fixed price is required"]


def test_zero_price_is_valid():
    doc = _sample_document(items=[_sample_item(fixed_price=0)])
    assert validate_document(doc) == []


def test_validation_does_not_mutate_document():
    doc = _sample_document(items=[_sample_item(sku="")])
    before = doc.model_dump()
    validate_document(doc)
    assert doc.model_dump() == before
