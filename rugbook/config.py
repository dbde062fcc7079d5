from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Business identity printed on every document
    BUSINESS_NAME: str = "MARCO POLO ORIENTAL RUGS, INC."
    BUSINESS_ADDRESS: str = "3260 DUKE ST"
    BUSINESS_CITY: str = "ALEXANDRIA"
    BUSINESS_STATE: str = "VA"
    BUSINESS_ZIP: str = "22314"
    BUSINESS_PHONE: str = "703-461-0207"
    BUSINESS_FAX: str = "703-461-0208"
    BUSINESS_WEBSITE: str = "www.marcopolorugs.com"
    BUSINESS_EMAIL: str = "marcopolorugs@aol.com"

    # New-document defaults for the editor
    DEFAULT_TERMS: str = "Due on Receipt"
    DEFAULT_MODE: str = "retail-per-rug"

    # Invoice numbering
    INVOICE_PREFIX: str = "MP"
    INVOICE_NUMBER_WIDTH: int = 8

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
