"""
Invoice numbering endpoints.

The service is built once per app (app.state.invoice_numbers) and reached
through get_invoice_numbers, which tests override with a fresh service.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from ..invoice_number import InvoiceNumberService
from ..schemas import CounterUpdate

router = APIRouter(prefix="/invoice-numbers", tags=["invoice-numbers"])


def get_invoice_numbers(request: Request) -> InvoiceNumberService:
    return request.app.state.invoice_numbers


@router.post("/next")
def next_invoice_number(service: InvoiceNumberService = Depends(get_invoice_numbers)):
    return {"invoice_number": service.next_number()}


@router.get("/current")
def current_counter(service: InvoiceNumberService = Depends(get_invoice_numbers)):
    return {"counter": service.current()}


@router.put("/counter")
def set_counter(
    update: CounterUpdate,
    service: InvoiceNumberService = Depends(get_invoice_numbers),
):
    try:
        service.set_counter(update.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"counter": service.current()}


@router.delete("/counter")
def reset_counter(service: InvoiceNumberService = Depends(get_invoice_numbers)):
    service.reset()
    return {"counter": service.current()}


@router.get("/validate/{invoice_number}")
def validate_invoice_number(
    invoice_number: str,
    service: InvoiceNumberService = Depends(get_invoice_numbers),
):
    return {"invoice_number": invoice_number, "valid": service.is_valid(invoice_number)}
