"""
HSN code table built from the extracted CBIC goods rates.

The raw table lists several codes per row and the same code in more than
one section (overlapping chapter ranges), so rows are split, normalized and
deduplicated here before the invoice form uses them for autocomplete and
automatic CGST/SGST/IGST rates.
"""
from __future__ import annotations

import json
import logging
import math
import re
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config import rates_json_path
from ..logging_config import log_with_context
from ..schemas import HSNCode, RawGoodsRateRecord

logger = logging.getLogger(__name__)

MIN_CODE_LENGTH = 4

_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]")
_NON_NUMERIC_RE = re.compile(r"[^0-9.]")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_NIL_RE = re.compile(r"^nil$", re.IGNORECASE)
_OMITTED_RE = re.compile(r"^\[?omitted", re.IGNORECASE)

RecordLike = Union[RawGoodsRateRecord, Dict[str, Any]]


def normalize_hsn_code(value: str) -> str:
    """Strip everything but ASCII letters/digits and uppercase: ' 0101.21 ' -> '010121'."""
    return _NON_ALNUM_RE.sub("", value or "").upper()


def parse_rate(value: Optional[str]) -> float:
    """
    Parse a rate cell like '18%', '2.5', 'Nil' or '' into a percentage.

    Stray symbols and footnote markers are dropped; anything that still
    does not parse counts as 0.
    """
    if not value:
        return 0.0
    trimmed = value.strip()
    if not trimmed or _NIL_RE.match(trimmed):
        return 0.0

    # Leading number only, so "5.5.1" reads as 5.5
    match = _LEADING_NUMBER_RE.match(_NON_NUMERIC_RE.sub("", trimmed))
    if not match:
        return 0.0
    rate = float(match.group(0))
    return rate if math.isfinite(rate) else 0.0


def _as_record(record: RecordLike) -> RawGoodsRateRecord:
    if isinstance(record, RawGoodsRateRecord):
        return record
    return RawGoodsRateRecord.model_validate(record or {})


def split_codes(chapter_heading: str) -> List[str]:
    """Normalized codes listed in one chapter/heading cell, short fragments dropped."""
    codes = (normalize_hsn_code(segment) for segment in chapter_heading.split(","))
    return [code for code in codes if len(code) >= MIN_CODE_LENGTH]


def build_hsn_table(records: Iterable[RecordLike]) -> Tuple[List[HSNCode], Dict[str, HSNCode]]:
    """
    Build the sorted HSN table and a code -> entry map from raw rate rows.

    When a code appears more than once the entry with the higher
    (cgst + sgst + igst) * len(description) wins; ties keep the first seen.
    """
    entries: Dict[str, HSNCode] = {}
    seen = 0

    for raw in records:
        seen += 1
        record = _as_record(raw)
        description = record.description.strip()
        if not record.chapter_heading or not description or _OMITTED_RE.match(description):
            continue

        codes = split_codes(record.chapter_heading)
        if not codes:
            continue

        cgst = parse_rate(record.cgst_rate)
        sgst = parse_rate(record.sgst_rate)
        igst = parse_rate(record.igst_rate)

        for code in codes:
            entry = HSNCode(code=code, description=description, cgst=cgst, sgst=sgst, igst=igst, cess=0.0)
            existing = entries.get(code)
            if existing is None:
                entries[code] = entry
            elif entry.score > existing.score:
                logger.debug("HSN %s: replacing %r with %r", code, existing.description, description)
                entries[code] = entry

    # Codes are uppercase ASCII alphanumerics, where ordinal order matches locale collation
    table = sorted(entries.values(), key=lambda e: e.code)
    by_code = {entry.code: entry for entry in table}

    log_with_context(logger, logging.INFO, "HSN table built", records=seen, codes=len(table))
    return table, by_code


def load_goods_rates(path: Union[str, Path, None] = None) -> List[RawGoodsRateRecord]:
    target = Path(path) if path else rates_json_path()
    with target.open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    return [RawGoodsRateRecord.model_validate(item) for item in data or []]


class HSNLookup:
    """Read-only view over the built table."""

    def __init__(self, table: Iterable[HSNCode]):
        self.codes: Tuple[HSNCode, ...] = tuple(table)
        self.by_code: Mapping[str, HSNCode] = MappingProxyType({e.code: e for e in self.codes})

    @classmethod
    def from_records(cls, records: Iterable[RecordLike]) -> "HSNLookup":
        table, _ = build_hsn_table(records)
        return cls(table)

    def __len__(self) -> int:
        return len(self.codes)

    def __contains__(self, code: str) -> bool:
        return normalize_hsn_code(code) in self.by_code

    def get(self, code: str) -> Optional[HSNCode]:
        """Look up a user-typed code, e.g. '0101.21' or ' 8517 '."""
        return self.by_code.get(normalize_hsn_code(code))

    def search(self, query: str, limit: int = 20) -> List[HSNCode]:
        """
        Autocomplete: code-prefix matches first (table order), then entries
        whose description contains the query (case-insensitive).
        """
        needle = (query or "").strip()
        if not needle or limit <= 0:
            return []

        code_prefix = normalize_hsn_code(needle)
        text = needle.lower()
        by_prefix: List[HSNCode] = []
        by_text: List[HSNCode] = []
        for entry in self.codes:
            if code_prefix and entry.code.startswith(code_prefix):
                by_prefix.append(entry)
            elif text in entry.description.lower():
                by_text.append(entry)
            if len(by_prefix) >= limit:
                break
        return (by_prefix + by_text)[:limit]


@lru_cache(maxsize=1)
def get_hsn_lookup() -> HSNLookup:
    """Table for the configured JSON file, built once per process."""
    return HSNLookup.from_records(load_goods_rates())


def reset_hsn_lookup() -> None:
    get_hsn_lookup.cache_clear()
