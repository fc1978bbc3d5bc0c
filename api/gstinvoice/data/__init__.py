"""
Static lookup data for the invoice form: HSN codes and dropdown lists.
"""

from .hsn_codes import (
    HSNLookup,
    build_hsn_table,
    get_hsn_lookup,
    load_goods_rates,
    normalize_hsn_code,
    parse_rate,
    reset_hsn_lookup,
)
from .reference import (
    INDIAN_STATES,
    TRANSPORT_MODES,
    UOM_OPTIONS,
    state_by_code,
    state_by_name,
    state_code_for,
)

__all__ = [
    "HSNLookup",
    "build_hsn_table",
    "get_hsn_lookup",
    "load_goods_rates",
    "normalize_hsn_code",
    "parse_rate",
    "reset_hsn_lookup",
    "INDIAN_STATES",
    "TRANSPORT_MODES",
    "UOM_OPTIONS",
    "state_by_code",
    "state_by_name",
    "state_code_for",
]
