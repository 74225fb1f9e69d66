"""Batch aggregation of seller sales files into ranked revenue and product reports."""

__version__ = "2.0.0"
