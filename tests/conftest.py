"""
Shared test fixtures: test client and a fresh invoice numbering service.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Keep test runs quiet and independent of any local .env
os.environ["LOG_LEVEL"] = "WARNING"

from rugbook.invoice_number import InMemoryCounterStore, InvoiceNumberService
from rugbook.main import app
from rugbook.routers.invoice_numbers import get_invoice_numbers


@pytest.fixture
def numbering():
    """Numbering service with its own counter, starting from zero."""
    return InvoiceNumberService(InMemoryCounterStore())


@pytest.fixture
def client(numbering):
    """FastAPI test client wired to the per-test numbering service."""
    app.dependency_overrides[get_invoice_numbers] = lambda: numbering
    yield TestClient(app)
    app.dependency_overrides.clear()
