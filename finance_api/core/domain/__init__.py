"""
Domain records.

Validated, immutable records for companies and markets.
"""

from finance_api.core.domain.company_info import CompanyInfo
from finance_api.core.domain.market_info import MarketInfo

__all__ = [
    "CompanyInfo",
    "MarketInfo",
]
