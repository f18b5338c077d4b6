"""
Identifiers — Правила для идентификаторов финансовых объектов

Единственное место, где описаны форматы:
- ISIN (ISO 6166): 2 буквы страны + 9 алфанумерических + check digit
- Код валюты (ISO 4217, alphabetic)
- Ticker (сокращение бумаги на бирже)
- Время сессии рынка (UTC, "HH:MM")

Все функции чистые, при нарушении правила поднимают ValueError.
"""

import re
from datetime import time, timezone
from typing import Final


# =============================================================================
# ФОРМАТЫ
# =============================================================================

ISIN_LENGTH: Final[int] = 12

# Страна (ISO 3166 alpha-2) + NSIN (9 символов) + check digit
ISIN_PATTERN: Final[re.Pattern] = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}[0-9]$")

CURRENCY_PATTERN: Final[re.Pattern] = re.compile(r"^[A-Z]{3}$")

# SAN, BRK.B, ITX.MC, 7203 ...
TICKER_PATTERN: Final[re.Pattern] = re.compile(r"^[A-Z0-9][A-Z0-9.\-]{0,11}$")

UTC_TIME_PATTERN: Final[re.Pattern] = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


# =============================================================================
# ISIN
# =============================================================================


def isin_check_digit(body: str) -> int:
    """
    Расчёт check digit для ISIN.

    Буквы раскрываются в числа (A=10 ... Z=35), затем по полученной строке
    цифр применяется алгоритм Luhn.

    Args:
        body: Первые 11 символов ISIN (без check digit)

    Returns:
        Check digit (0-9)

    Raises:
        ValueError: Если body имеет неверную длину или недопустимые символы
    """
    if len(body) != ISIN_LENGTH - 1 or not body.isalnum() or not body.isascii():
        raise ValueError(f"ISIN body must be 11 alphanumeric chars, got {body!r}")

    digits = "".join(str(int(char, 36)) for char in body.upper())

    total = 0
    for position, char in enumerate(reversed(digits)):
        value = int(char)
        # Удваивается каждая вторая цифра, начиная с самой правой
        if position % 2 == 0:
            value *= 2
        total += value // 10 + value % 10

    return (10 - total % 10) % 10


def is_valid_isin(value: str) -> bool:
    """Проверка ISIN без exception (формат + check digit)."""
    if not isinstance(value, str):
        return False
    candidate = value.strip().upper()
    if not ISIN_PATTERN.match(candidate):
        return False
    return isin_check_digit(candidate[:-1]) == int(candidate[-1])


def validate_isin(value: str) -> str:
    """
    Валидация ISIN.

    Args:
        value: ISIN (регистр не важен, пробелы по краям игнорируются)

    Returns:
        Нормализованный ISIN в верхнем регистре

    Raises:
        ValueError: Если формат неверный или check digit не совпадает
    """
    candidate = value.strip().upper()
    if not ISIN_PATTERN.match(candidate):
        raise ValueError(f"ISIN {value!r} does not match format CC + 9 alphanumerics + digit")

    expected = isin_check_digit(candidate[:-1])
    if expected != int(candidate[-1]):
        raise ValueError(
            f"ISIN {value!r} has invalid check digit {candidate[-1]} (expected {expected})"
        )
    return candidate


# =============================================================================
# ВАЛЮТА И TICKER
# =============================================================================


def validate_currency(code: str) -> str:
    """
    Валидация кода валюты ISO 4217 (EUR, USD, JPY ...).

    Returns:
        Код в верхнем регистре

    Raises:
        ValueError: Если код не из трёх латинских букв
    """
    candidate = code.strip().upper()
    if not CURRENCY_PATTERN.match(candidate):
        raise ValueError(f"Currency {code!r} is not an ISO 4217 alphabetic code")
    return candidate


def validate_ticker(value: str) -> str:
    """
    Валидация ticker.

    Регистр не нормализуется: сравнение тикеров всегда точное.

    Raises:
        ValueError: Если ticker пустой или содержит недопустимые символы
    """
    if not TICKER_PATTERN.match(value):
        raise ValueError(
            f"Ticker {value!r} must be 1-12 chars of A-Z, 0-9, '.', '-' "
            "starting with a letter or digit"
        )
    return value


# =============================================================================
# ВРЕМЯ СЕССИИ
# =============================================================================


def parse_utc_time(value: str) -> time:
    """
    Разбор времени сессии рынка.

    Args:
        value: Время в формате "HH:MM" (24h, UTC)

    Returns:
        datetime.time с tzinfo=UTC

    Raises:
        ValueError: Если формат неверный
    """
    match = UTC_TIME_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Time {value!r} must be formatted as HH:MM (24h, UTC)")
    return time(int(match.group(1)), int(match.group(2)), tzinfo=timezone.utc)
