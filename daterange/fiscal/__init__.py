"""Fiscal year public API."""

from .fiscal_year import REFERENCE_YEAR, FiscalYear

__all__ = ["FiscalYear", "REFERENCE_YEAR"]
