"""Runtime configuration loaded from the environment and an optional ``.env`` file."""
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_FILE)


class Settings(BaseSettings):
    """Application settings.

    Fee and consumption tax rates are applied to new invoices only; each invoice
    stores the rates it was priced with.
    """

    app_name: str = "Super Payment Invoice API"
    environment: str = Field(default="development", alias="ENVIRONMENT")
    database_url: str = Field(
        default="sqlite:///./data/dev.db",
        description="SQLAlchemy database URL",
        alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    fee_rate: Decimal = Field(default=Decimal("0.04"), alias="FEE_RATE")
    consumption_tax_rate: Decimal = Field(default=Decimal("0.10"), alias="CONSUMPTION_TAX_RATE")

    default_page_size: int = Field(default=20, ge=1, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, alias="MAX_PAGE_SIZE")

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
