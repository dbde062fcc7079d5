from fastapi import APIRouter

from ..calculations import SALES_TAX_RATE
from ..config import settings

router = APIRouter(prefix="/business", tags=["business"])


@router.get("")
def business_info():
    """Letterhead and new-document defaults for the editor and print template."""
    return {
        "name": settings.BUSINESS_NAME,
        "address": settings.BUSINESS_ADDRESS,
        "city": settings.BUSINESS_CITY,
        "state": settings.BUSINESS_STATE,
        "zip": settings.BUSINESS_ZIP,
        "phone": settings.BUSINESS_PHONE,
        "fax": settings.BUSINESS_FAX,
        "website": settings.BUSINESS_WEBSITE,
        "email": settings.BUSINESS_EMAIL,
        "default_terms": settings.DEFAULT_TERMS,
        "default_mode": settings.DEFAULT_MODE,
        "sales_tax_rate": SALES_TAX_RATE,
    }
