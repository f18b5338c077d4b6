"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и pattern
- Согласованность с Pydantic моделями и Company.to_dict()
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from finance_api.core.contracts import (
    CompanyValidator,
    MarketValidator,
    SchemaLoader,
    validate_company,
    validate_market,
)
from finance_api.core.domain import CompanyInfo, MarketInfo
from finance_api.static import StaticCompany


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_company():
    """Валидная company для тестирования."""
    return {
        "name": "Inditex",
        "full_name": "Industria de Diseño Textil, S.A.",
        "isin": "ES0148396007",
        "ticker": "ITX",
        "extra_id": "A15075062",
    }


@pytest.fixture
def valid_market(valid_company):
    """Валидный market для тестирования."""
    return {
        "market_name": "IBEX35",
        "open_time": "08:00",
        "close_time": "16:30",
        "currency": "EUR",
        "companies": [
            valid_company,
            {"name": "Bankinter", "full_name": None, "isin": "ES0113679I37", "ticker": "BKT", "extra_id": None},
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем"""

    @pytest.mark.parametrize("schema_name", ["company", "market"])
    def test_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("market") is loader.load_schema("market")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("portfolio")

    def test_missing_schema_dir(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COMPANY CONTRACT
# =============================================================================


class TestCompanyContract:
    """company.json"""

    def test_valid(self, valid_company):
        validate_company(valid_company)
        assert CompanyValidator().is_valid(valid_company)

    def test_minimal(self):
        validate_company({"name": "BBVA", "isin": "ES0113211835", "ticker": "BBVA"})

    @pytest.mark.parametrize("field", ["name", "isin", "ticker"])
    def test_required(self, valid_company, field):
        del valid_company[field]
        with pytest.raises(ValidationError):
            validate_company(valid_company)

    def test_lower_case_isin_rejected(self, valid_company):
        valid_company["isin"] = "es0148396007"
        assert not CompanyValidator().is_valid(valid_company)

    def test_wrong_type(self, valid_company):
        valid_company["extra_id"] = 15075062
        with pytest.raises(ValidationError):
            validate_company(valid_company)

    def test_additional_properties_rejected(self, valid_company):
        valid_company["sector"] = "Retail"
        with pytest.raises(ValidationError):
            validate_company(valid_company)

    def test_iter_errors_reports_all(self, valid_company):
        valid_company["isin"] = "bad"
        valid_company["ticker"] = ""
        errors = list(CompanyValidator().iter_errors(valid_company))
        assert len(errors) == 2

    def test_to_dict_conforms(self, valid_company):
        """Company.to_dict() проходит контракт"""
        company = StaticCompany.from_dict(valid_company)
        validate_company(company.to_dict())

    def test_pydantic_dump_conforms(self, valid_company):
        validate_company(CompanyInfo(**valid_company).model_dump())


# =============================================================================
# MARKET CONTRACT
# =============================================================================


class TestMarketContract:
    """market.json"""

    def test_valid(self, valid_market):
        validate_market(valid_market)
        assert MarketValidator().is_valid(valid_market)

    def test_without_companies(self, valid_market):
        del valid_market["companies"]
        validate_market(valid_market)

    @pytest.mark.parametrize("field", ["market_name", "open_time", "close_time", "currency"])
    def test_required(self, valid_market, field):
        del valid_market[field]
        with pytest.raises(ValidationError):
            validate_market(valid_market)

    @pytest.mark.parametrize("value", ["8:00", "24:00", "08:00:00"])
    def test_time_pattern(self, valid_market, value):
        valid_market["open_time"] = value
        with pytest.raises(ValidationError):
            validate_market(valid_market)

    def test_currency_pattern(self, valid_market):
        valid_market["currency"] = "eur"
        with pytest.raises(ValidationError):
            validate_market(valid_market)

    def test_nested_company_checked(self, valid_market):
        del valid_market["companies"][0]["ticker"]
        with pytest.raises(ValidationError):
            validate_market(valid_market)

    def test_pydantic_dump_conforms(self, valid_market):
        validate_market(MarketInfo.model_validate(valid_market).model_dump())
