"""
finance_api — Finance Library API

Contracts that abstract objects related to financial markets. The library
does not implement any market by itself: it defines a public API other
libraries can import and use without knowing which implementation is behind,
so they can stay agnostic of whether the exchange is the NASDAQ100 or the
S&P500.

Applications choose a package that actually implements the contracts.
StaticMarket is an in-memory implementation for tests and small catalogs.
"""

from finance_api.core.domain import CompanyInfo, MarketInfo
from finance_api.core.interfaces import Company, Market
from finance_api.static import LoaderConfig, StaticCompany, StaticMarket, load_market

__version__ = "0.1.0"

__all__ = [
    # Contracts
    "Company",
    "Market",
    # Records
    "CompanyInfo",
    "MarketInfo",
    # In-memory implementation
    "StaticCompany",
    "StaticMarket",
    "LoaderConfig",
    "load_market",
]
