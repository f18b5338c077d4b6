"""
Contracts for financial market objects.

Abstract base classes only: concrete implementations live in other packages.
"""

from finance_api.core.interfaces.company import Company
from finance_api.core.interfaces.market import Market

__all__ = [
    "Company",
    "Market",
]
