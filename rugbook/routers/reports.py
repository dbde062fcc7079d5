from typing import List

from fastapi import APIRouter, HTTPException

from ..reports import build_sales_report, search_documents
from ..schemas import InvoiceDocument, SalesReport, SalesReportRequest, SearchRequest

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("/sales", response_model=SalesReport)
def sales_report(request: SalesReportRequest):
    """Sales for a date range, newest first. Documents come from the caller."""
    if request.end_date < request.start_date:
        raise HTTPException(status_code=400, detail="end_date is before start_date")
    return build_sales_report(request.documents, request.start_date, request.end_date)


@router.post("/search", response_model=List[InvoiceDocument])
def search(request: SearchRequest):
    return search_documents(request.documents, request.query)
