# api/gstinvoice/parsers/rate_table.py
"""
Extract the goods rate table from the CBIC "GST Goods and Services Rates"
page into a flat JSON array.

The page is saved by hand from the CBIC site and dropped in the project
root; re-run this whenever a new copy is saved:

    python scripts/extract_gst_rates.py
    python scripts/extract_gst_rates.py --html page.html --output rates.json
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import re
import stat
import sys
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from ..config import log_json, log_level, rates_html_path, rates_json_path
from ..errors import TableNotFoundError
from ..logging_config import setup_structured_logging
from ..schemas import RawGoodsRateRecord

logger = logging.getLogger(__name__)

GOODS_TABLE_ID = "goods_table"

# 0-indexed td positions; S.No. and Schedule columns are discarded
COL_CHAPTER_HEADING = 2
COL_DESCRIPTION = 3
COL_CGST = 4
COL_SGST = 5
COL_IGST = 6

# U+FEFF is whitespace to browsers but not to Python's \s
_WS_RE = re.compile(r"[\s\ufeff]+")


def clean_text(value: Optional[str]) -> str:
    if not value:
        return ""
    return _WS_RE.sub(" ", value.replace("\u00a0", " ")).strip()


def _cell(cells: List[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def extract_goods_rates(html: str) -> List[RawGoodsRateRecord]:
    """Return one record per body row of the goods table, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find(id=GOODS_TABLE_ID)
    if table is None:
        raise TableNotFoundError(GOODS_TABLE_ID)

    records: List[RawGoodsRateRecord] = []
    for row in table.select("tbody tr"):
        cells = [clean_text(td.get_text()) for td in row.find_all("td")]
        if not cells:
            continue

        record = RawGoodsRateRecord(
            chapter_heading=_cell(cells, COL_CHAPTER_HEADING),
            description=_cell(cells, COL_DESCRIPTION),
            cgst_rate=_cell(cells, COL_CGST),
            sgst_rate=_cell(cells, COL_SGST),
            igst_rate=_cell(cells, COL_IGST),
        )
        if record.has_content():
            records.append(record)

    return records


def _output_mode(path: Path) -> int:
    """Keep an existing file's mode; new files get 0666 minus the umask."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_goods_rates(records: Iterable[RawGoodsRateRecord], path: Path) -> None:
    """Write records as a pretty-printed JSON array, replacing `path` in one step."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.model_dump(by_alias=True) for r in records]
    text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fp:
            fp.write(text)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def run(html_path: Path, output_path: Path) -> int:
    html = html_path.read_text(encoding="utf-8")
    records = extract_goods_rates(html)
    write_goods_rates(records, output_path)
    logger.info("Wrote %d goods rate rows to %s", len(records), output_path)
    print(f"Extracted {len(records)} GST goods rate entries to {output_path}")
    return len(records)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Extract the CBIC goods rate table to JSON")
    p.add_argument("--html", type=Path, default=None, help="Saved CBIC rates page")
    p.add_argument("--output", type=Path, default=None, help="JSON file to write")
    args = p.parse_args(argv)

    setup_structured_logging(use_json=log_json(), log_level=log_level())

    html_path = args.html or rates_html_path()
    output_path = args.output or rates_json_path()
    try:
        run(html_path, output_path)
    except (TableNotFoundError, FileNotFoundError) as e:
        logger.error("Rate extraction failed for %s: %s", html_path, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
