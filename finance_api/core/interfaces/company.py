"""
Company — Контракт компании, включённой в рынок

Абстрактное описание данных, которые обязана предоставлять любая компания
из Market. Конкретная реализация (IBEX35, NASDAQ100, ...) определяется
библиотекой-реализацией, модули опираются только на этот контракт.

Ключевые данные компании:
- Short name: имя, под которым компания обычно фигурирует на бирже
- Full name: полное официальное наименование
- ISIN: International Securities Identification Number
- Ticker: сокращение бумаги на рынке
- Extra ID: национальный идентификатор (например, NIF в Испании)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Company(ABC):
    """
    Абстрактная компания (facade).

    Все свойства read-only. Реализация обязана определить name, full_name,
    isin, ticker и extra_id; строковое представление и сериализация
    предоставляются контрактом.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Наиболее употребимое имя бумаги."""

    @property
    @abstractmethod
    def full_name(self) -> Optional[str]:
        """
        Полное (юридическое) имя бумаги.

        None, если полное имя не задано. Обычно так бывает, когда оно
        совпадает с коротким именем.
        """

    @property
    @abstractmethod
    def isin(self) -> str:
        """ISIN бумаги."""

    @property
    @abstractmethod
    def ticker(self) -> str:
        """Ticker бумаги."""

    @property
    @abstractmethod
    def extra_id(self) -> Optional[str]:
        """
        Дополнительный национальный идентификатор.

        Некоторые страны присваивают компаниям собственные номера для
        национальных реестров. Например, у компаний с головным офисом
        в Испании есть NIF.

        Returns:
            None, если идентификатор не привязан к бумаге
        """

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в dict (совместим с контрактом company.json)."""
        return {
            "name": self.name,
            "full_name": self.full_name,
            "isin": self.isin,
            "ticker": self.ticker,
            "extra_id": self.extra_id,
        }

    def __str__(self) -> str:
        return f"{self.ticker}: {self.name}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.full_name!r}, {self.name!r}, "
            f"{self.ticker!r}, {self.isin!r}, {self.extra_id!r})"
        )
