import enum


# --- Enums shared by schemas and the calculation engine ---

class RugShape(str, enum.Enum):
    RECTANGLE = "rectangle"
    ROUND = "round"


class InvoiceMode(str, enum.Enum):
    # "retail" / "wholesale" decides discount and tax.
    # "per-rug" / "per-sqft" decides which price field is read.
    RETAIL_PER_RUG = "retail-per-rug"
    WHOLESALE_PER_RUG = "wholesale-per-rug"
    RETAIL_PER_SQFT = "retail-per-sqft"
    WHOLESALE_PER_SQFT = "wholesale-per-sqft"


class DocumentType(str, enum.Enum):
    INVOICE = "INVOICE"
    CONSIGNMENT = "CONSIGNMENT"  # goods held for future sale, never taxed
