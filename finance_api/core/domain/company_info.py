"""
CompanyInfo — Запись с данными компании

Immutable Pydantic модель, валидирующая сырые данные компании перед тем,
как они станут реализацией контракта Company.
Совместима с JSON Schema (core/contracts/schema/company.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from finance_api.core.identifiers import validate_isin, validate_ticker


class CompanyInfo(BaseModel):
    """
    Данные компании, включённой в рынок.

    Immutable модель (frozen=True). ISIN нормализуется в верхний регистр,
    пустые optional-поля приводятся к None.
    """

    name: str = Field(..., min_length=1, description="Короткое имя (например, 'Santander')")
    full_name: Optional[str] = Field(
        None, description="Полное юридическое имя (nullable)"
    )
    isin: str = Field(..., description="ISIN (ISO 6166)")
    ticker: str = Field(..., description="Ticker на рынке (например, 'SAN')")
    extra_id: Optional[str] = Field(
        None, description="Национальный идентификатор, например NIF (nullable)"
    )

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @field_validator("full_name", "extra_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Пустая строка означает отсутствие значения."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("isin")
    @classmethod
    def validate_isin_format(cls, v: str) -> str:
        """Формат ISIN и check digit."""
        return validate_isin(v)

    @field_validator("ticker")
    @classmethod
    def validate_ticker_format(cls, v: str) -> str:
        return validate_ticker(v)
