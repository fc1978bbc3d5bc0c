"""
Parsers for source documents published by CBIC.
"""

from .rate_table import clean_text, extract_goods_rates, write_goods_rates

__all__ = ["clean_text", "extract_goods_rates", "write_goods_rates"]
