"""
Pytest configuration for the gstinvoice tests.

Puts api/ on the import path so the tests run without installing the package.
"""

import sys
import os
from pathlib import Path

import pytest

api_path = os.path.join(os.path.dirname(__file__), '..', 'api')
if api_path not in sys.path:
    sys.path.insert(0, api_path)

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_html() -> str:
    return (FIXTURES / "goods_rates_sample.html").read_text(encoding="utf-8")


@pytest.fixture
def live_horses_record() -> dict:
    return {
        "chapterHeading": "0101, 01012100",
        "description": "Live horses",
        "cgstRate": "2.5%",
        "sgstRate": "2.5%",
        "igstRate": "5%",
    }


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # The CLI and the API reconfigure the root logger; undo it per test
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
