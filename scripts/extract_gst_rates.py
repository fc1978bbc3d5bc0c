#!/usr/bin/env python3
"""
Extract the CBIC goods rate table into api/gstinvoice/data/gst-goods-rates.json.

Usage:
    python3 scripts/extract_gst_rates.py [--html PAGE.html] [--output OUT.json]
"""
import sys
from pathlib import Path

# Add api directory to path to import gstinvoice without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "api"))

from gstinvoice.parsers.rate_table import main

if __name__ == "__main__":
    sys.exit(main())
