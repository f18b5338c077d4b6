"""
Test suite for finance_api

Contains:
- tests/unit/          : Unit tests for contracts, records and the in-memory market
"""
