"""
jsonmender core.

Shared constants and the quote scanner used by the repair steps.
"""

from .quote_state import QuoteState, ScanState, count_unescaped_quotes

__all__ = ["QuoteState", "ScanState", "count_unescaped_quotes"]
