"""GSTIN format checks and state-code extraction."""

import re
from typing import Optional

# 2-digit state + 10-char PAN + entity number + 'Z' + check character
GSTIN_REGEX = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


def normalize_gstin(value: Optional[str]) -> str:
    if not value:
        return ""
    return re.sub(r"\s+", "", value).upper()


def is_valid_gstin(value: Optional[str]) -> bool:
    gstin = normalize_gstin(value)
    return len(gstin) == 15 and bool(GSTIN_REGEX.match(gstin))


def state_code_from_gstin(value: Optional[str]) -> Optional[str]:
    """Extract state code from GSTIN (first 2 digits)."""
    if not is_valid_gstin(value):
        return None
    return normalize_gstin(value)[:2]
