"""
Core contracts, identifier rules and validated records.

This package has no knowledge of any concrete market implementation.
"""
