"""
In-memory implementation of the market contracts.
"""

from finance_api.static.market import LoaderConfig, StaticCompany, StaticMarket, load_market

__all__ = [
    "LoaderConfig",
    "StaticCompany",
    "StaticMarket",
    "load_market",
]
