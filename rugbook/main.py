from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .invoice_number import InMemoryCounterStore, InvoiceNumberService
from .routers import business, invoices, invoice_numbers, reports

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("rugbook")

app = FastAPI(
    title="Rugbook",
    description="Invoice and consignment calculations for rug sales",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One numbering service per app; swap the store for a durable one in deployment
app.state.invoice_numbers = InvoiceNumberService(
    InMemoryCounterStore(),
    prefix=settings.INVOICE_PREFIX,
    width=settings.INVOICE_NUMBER_WIDTH,
)

# API routes
app.include_router(invoices.router, prefix="/api")
app.include_router(invoice_numbers.router, prefix="/api")
app.include_router(reports.router, prefix="/api")
app.include_router(business.router, prefix="/api")

logger.info(f"Rugbook API ready ({settings.BUSINESS_NAME})")


@app.get("/health")
def health():
    return {"status": "ok", "app": "rugbook"}
