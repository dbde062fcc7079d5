from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .models import DocumentType, InvoiceMode, RugShape


class LineItem(BaseModel):
    id: str
    sku: str = ""
    description: str = ""
    shape: RugShape = RugShape.RECTANGLE
    width_feet: float = 0
    width_inches: float = 0
    length_feet: float = 0   # ignored for round rugs
    length_inches: float = 0  # ignored for round rugs
    price_per_sq_ft: Optional[float] = None  # read in per-sqft modes
    fixed_price: Optional[float] = None      # read in per-rug modes
    returned: bool = False
    return_note: Optional[str] = None


class SoldTo(BaseModel):
    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    phone: str = ""
    email: Optional[str] = None


class InvoiceDocument(BaseModel):
    document_type: DocumentType = DocumentType.INVOICE
    invoice_number: str = ""
    date: Optional[str] = None
    terms: str = ""
    sold_to: SoldTo = Field(default_factory=SoldTo)
    items: List[LineItem] = []
    mode: InvoiceMode = InvoiceMode.RETAIL_PER_RUG
    discount_percentage: Optional[float] = None  # only honored in retail modes
    notes: Optional[str] = None
    signature: Optional[str] = None  # base64 image from the signature pad
    returned: bool = False
    return_note: Optional[str] = None


class CalculatedItem(LineItem):
    square_foot: float
    amount: float


class CalculationResult(BaseModel):
    items: List[CalculatedItem] = []
    subtotal: float
    discount: float
    subtotal_after_discount: float
    sales_tax: float
    total_due: float


class ValidationReport(BaseModel):
    valid: bool
    errors: List[str] = []


# --- Invoice numbering ---

class CounterUpdate(BaseModel):
    value: int


# --- Reports ---

class SalesReportRequest(BaseModel):
    start_date: date
    end_date: date
    documents: List[InvoiceDocument] = []


class SalesReportRow(BaseModel):
    date: str
    invoice_number: str
    customer: str
    total_due: float


class SalesReport(BaseModel):
    start_date: date
    end_date: date
    rows: List[SalesReportRow] = []
    invoice_count: int = 0
    total_sales: float = 0.0


class SearchRequest(BaseModel):
    query: str = ""
    documents: List[InvoiceDocument] = []
