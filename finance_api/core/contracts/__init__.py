"""
Contract Validation Module

Валидация JSON документов компаний и рынков.
"""

from .validators import (
    CompanyValidator,
    ContractValidator,
    MarketValidator,
    SchemaLoader,
    validate_company,
    validate_market,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CompanyValidator",
    "MarketValidator",
    # Functions
    "validate_company",
    "validate_market",
]
