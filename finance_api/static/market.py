"""
Static Market — In-memory реализация контрактов Company и Market

Рынок строится один раз из валидированной записи MarketInfo (или из JSON
документа) и далее не меняется. Используется как reference-реализация
и как test double в тестах библиотек, зависящих от контрактов.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from finance_api.core.contracts import validate_market
from finance_api.core.domain import CompanyInfo, MarketInfo
from finance_api.core.interfaces import Company, Market

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LoaderConfig:
    """Конфигурация загрузки рынка из JSON."""

    # Проверять документ по контракту market.json до построения записи
    validate_schema: bool = True
    encoding: str = "utf-8"


# =============================================================================
# COMPANY
# =============================================================================


class StaticCompany(Company):
    """Компания поверх неизменяемой записи CompanyInfo."""

    def __init__(self, info: CompanyInfo):
        self._info = info

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StaticCompany":
        """
        Raises:
            pydantic.ValidationError: Если данные компании невалидны
        """
        return cls(CompanyInfo.model_validate(data))

    @property
    def info(self) -> CompanyInfo:
        return self._info

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def full_name(self) -> Optional[str]:
        return self._info.full_name

    @property
    def isin(self) -> str:
        return self._info.isin

    @property
    def ticker(self) -> str:
        return self._info.ticker

    @property
    def extra_id(self) -> Optional[str]:
        return self._info.extra_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticCompany):
            return NotImplemented
        return self._info == other._info

    def __hash__(self) -> int:
        return hash(self._info)


# =============================================================================
# MARKET
# =============================================================================


class StaticMarket(Market):
    """
    Рынок поверх неизменяемой записи MarketInfo.

    Компании хранятся в порядке листинга; индекс по ticker даёт
    stock_by_ticker за O(1).
    """

    def __init__(self, info: MarketInfo):
        self._info = info
        self._companies: List[Company] = [StaticCompany(company) for company in info.companies]
        self._by_ticker: Dict[str, Company] = {
            company.ticker: company for company in self._companies
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], config: Optional[LoaderConfig] = None
    ) -> "StaticMarket":
        """
        Построение рынка из dict (формат контракта market.json).

        Raises:
            jsonschema.ValidationError: Если документ не соответствует контракту
            pydantic.ValidationError: Если нарушены инварианты записи
        """
        config = config or LoaderConfig()
        if config.validate_schema:
            validate_market(data)
        return cls(MarketInfo.model_validate(data))

    @property
    def info(self) -> MarketInfo:
        return self._info

    @property
    def market_name(self) -> str:
        return self._info.market_name

    @property
    def open_time(self) -> str:
        return self._info.open_time

    @property
    def close_time(self) -> str:
        return self._info.close_time

    @property
    def currency(self) -> str:
        return self._info.currency

    def get_companies(self) -> List[Company]:
        return list(self._companies)

    def list_tickers(self) -> List[str]:
        return list(self._by_ticker)

    def stock_by_ticker(self, ticker: str) -> Optional[Company]:
        return self._by_ticker.get(ticker)

    def __len__(self) -> int:
        return len(self._companies)

    def __repr__(self) -> str:
        return (
            f"StaticMarket(market_name={self.market_name!r}, currency={self.currency!r}, "
            f"companies={len(self._companies)})"
        )


# =============================================================================
# LOADING
# =============================================================================


def load_market(path: Path | str, config: Optional[LoaderConfig] = None) -> StaticMarket:
    """
    Загрузка рынка из JSON файла.

    Args:
        path: Путь к JSON документу (формат контракта market.json)
        config: Параметры загрузки (по умолчанию LoaderConfig())

    Returns:
        StaticMarket

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если документ не соответствует контракту
        pydantic.ValidationError: Если нарушены инварианты записи
    """
    config = config or LoaderConfig()
    market_path = Path(path)
    if not market_path.exists():
        raise FileNotFoundError(f"Market document not found: {market_path}")

    with open(market_path, "r", encoding=config.encoding) as f:
        data = json.load(f)

    logger.debug(
        "Read market document %s (schema validation: %s)", market_path, config.validate_schema
    )
    market = StaticMarket.from_dict(data, config)
    logger.info(
        "Loaded market %s with %d companies from %s",
        market.market_name,
        len(market),
        market_path,
    )
    return market
