import os
from pathlib import Path

from dotenv import load_dotenv

# Don't override variables already set in the process environment
load_dotenv(override=False)

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parents[1]

SOURCE_HTML_NAME = "Goods & Service Tax, CBIC, Government of India __ GST Goods and Services Rates.html"


def rates_html_path() -> Path:
    """Source HTML page saved from the CBIC rates site."""
    return Path(os.getenv("GST_RATES_HTML") or PROJECT_ROOT / SOURCE_HTML_NAME)


def rates_json_path() -> Path:
    """Extractor output, read back by the HSN lookup builder."""
    return Path(os.getenv("GST_RATES_JSON") or PACKAGE_DIR / "data" / "gst-goods-rates.json")


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def log_json() -> bool:
    return os.getenv("LOG_JSON", "false").lower() == "true"


def cors_origins() -> list[str]:
    # Format: comma-separated list of origins, e.g. "http://localhost:5173,https://yourdomain.com"
    raw = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
