"""
MarketInfo — Запись с данными рынка

Immutable Pydantic модель: описание рынка и список его компаний.
Совместима с JSON Schema (core/contracts/schema/market.json).
"""

from pydantic import BaseModel, Field, field_validator

from finance_api.core.domain.company_info import CompanyInfo
from finance_api.core.identifiers import parse_utc_time, validate_currency


class MarketInfo(BaseModel):
    """
    Данные фондового рынка.

    Immutable модель (frozen=True). Инварианты:
    1. open_time и close_time в формате "HH:MM" (UTC) и не совпадают
    2. currency: код ISO 4217 в верхнем регистре
    3. Ticker и ISIN уникальны в пределах рынка
    """

    market_name: str = Field(..., min_length=1, description="Имя рынка (например, 'IBEX35')")
    open_time: str = Field(..., description="Время открытия (UTC, HH:MM)")
    close_time: str = Field(..., description="Время закрытия (UTC, HH:MM)")
    currency: str = Field(..., description="Валюта рынка (ISO 4217)")
    companies: list[CompanyInfo] = Field(
        default_factory=list, description="Компании рынка в порядке листинга"
    )

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @field_validator("open_time")
    @classmethod
    def validate_open_time(cls, v: str) -> str:
        parse_utc_time(v)
        return v

    @field_validator("close_time")
    @classmethod
    def validate_close_time(cls, v: str, info) -> str:
        """Формат HH:MM и отличие от open_time (сессия нулевой длины невалидна)."""
        parse_utc_time(v)
        if info.data.get("open_time") == v:
            raise ValueError(f"close_time {v} must differ from open_time")
        return v

    @field_validator("currency")
    @classmethod
    def validate_currency_code(cls, v: str) -> str:
        return validate_currency(v)

    @field_validator("companies")
    @classmethod
    def validate_unique_identifiers(cls, v: list[CompanyInfo]) -> list[CompanyInfo]:
        """Ticker и ISIN не повторяются."""
        tickers: set[str] = set()
        isins: set[str] = set()
        for company in v:
            if company.ticker in tickers:
                raise ValueError(f"Duplicate ticker {company.ticker!r}")
            if company.isin in isins:
                raise ValueError(f"Duplicate ISIN {company.isin!r}")
            tickers.add(company.ticker)
            isins.add(company.isin)
        return v
