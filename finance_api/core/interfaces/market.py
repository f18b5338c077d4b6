"""
Market — Контракт фондового рынка

Абстрактное описание функциональности, ожидаемой от объекта, который
представляет фондовый рынок (например, NASDAQ100 или IBEX35). Контракт
следует паттерну facade: модули опираются на него, не зная конечной
реализации для конкретного рынка.

Ключевые данные рынка:
- Время открытия и закрытия (UTC)
- Набор бумаг, торгуемых на рынке
- Валюта (ISO 4217)

Операции поиска (list_tickers, stock_by_name, stock_by_ticker, is_open)
реализованы поверх абстрактных членов. Реализации могут переопределять
их ради эффективности, сохраняя семантику.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from finance_api.core.identifiers import parse_utc_time
from finance_api.core.interfaces.company import Company


class Market(ABC):
    """Абстрактный фондовый рынок (facade)."""

    # -------------------------------------------------------------------------
    # Абстрактные члены
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def market_name(self) -> str:
        """Имя рынка, например IBEX35 или NASDAQ100."""

    @property
    @abstractmethod
    def open_time(self) -> str:
        """Время открытия рынка (UTC, "HH:MM")."""

    @property
    @abstractmethod
    def close_time(self) -> str:
        """Время закрытия рынка (UTC, "HH:MM")."""

    @property
    @abstractmethod
    def currency(self) -> str:
        """Код валюты рынка (ISO 4217)."""

    @abstractmethod
    def get_companies(self) -> List[Company]:
        """
        Список всех компаний рынка.

        Returns:
            Компании в порядке листинга
        """

    # -------------------------------------------------------------------------
    # Операции поиска
    # -------------------------------------------------------------------------

    def list_tickers(self) -> List[str]:
        """Ticker каждой компании рынка в порядке листинга."""
        return [company.ticker for company in self.get_companies()]

    def stock_by_name(self, name: str, ignore_case: bool = False) -> Optional[List[Company]]:
        """
        Поиск компаний по имени.

        name применяется как регулярное выражение (re.search) к короткому
        имени каждой компании. Слишком общее выражение может совпасть
        с несколькими бумагами: например, "Bank" совпадёт со всеми банками.

        Args:
            name: Регулярное выражение
            ignore_case: Игнорировать регистр при сравнении

        Returns:
            Список совпавших компаний в порядке листинга или None,
            если совпадений нет (пустой список не возвращается)

        Raises:
            re.error: Если name не является корректным регулярным выражением
        """
        pattern = re.compile(name, re.IGNORECASE if ignore_case else 0)
        matches = [company for company in self.get_companies() if pattern.search(company.name)]
        return matches or None

    def stock_by_ticker(self, ticker: str) -> Optional[Company]:
        """
        Поиск компании по ticker.

        В отличие от stock_by_name, сравнение точное: частичный ticker
        не даёт совпадения.

        Returns:
            Компания с ticker == ticker или None
        """
        for company in self.get_companies():
            if company.ticker == ticker:
                return company
        return None

    def is_open(self, at: datetime) -> bool:
        """
        Открыт ли рынок в момент at.

        Aware datetime переводится в UTC, naive считается UTC. Если
        close_time < open_time, сессия переходит через полночь.
        Выходные и праздники не учитываются.

        Args:
            at: Момент времени

        Returns:
            True, если at попадает в [open_time, close_time)
        """
        if at.tzinfo is None:
            current = at.time()
        else:
            current = at.astimezone(timezone.utc).time()

        opening = parse_utc_time(self.open_time).replace(tzinfo=None)
        closing = parse_utc_time(self.close_time).replace(tzinfo=None)

        if opening <= closing:
            return opening <= current < closing
        return current >= opening or current < closing

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.get_companies())

    def __iter__(self) -> Iterator[Company]:
        return iter(self.get_companies())

    def __contains__(self, ticker: object) -> bool:
        return isinstance(ticker, str) and self.stock_by_ticker(ticker) is not None

    def __str__(self) -> str:
        return f"{self.market_name} ({self.currency})"
