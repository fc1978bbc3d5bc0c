import logging
from typing import List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import cors_origins, log_json, log_level
from .data.hsn_codes import get_hsn_lookup
from .data.reference import INDIAN_STATES, TRANSPORT_MODES, UOM_OPTIONS
from .logging_config import setup_structured_logging
from .schemas import HSNCode, IndianState

setup_structured_logging(use_json=log_json(), log_level=log_level())
logger = logging.getLogger(__name__)

app = FastAPI(title="GST Invoice Rates API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)


@app.get("/health")
def health():
    """JSON health/info endpoint for monitoring and scripts."""
    return {"ok": True, "service": "GST Invoice Rates API", "version": __version__}


@app.get("/v1/hsn", response_model=List[HSNCode])
def list_hsn(q: str = "", limit: int = Query(20, ge=1, le=500)):
    lookup = get_hsn_lookup()
    if q.strip():
        return lookup.search(q, limit=limit)
    return list(lookup.codes[:limit])


@app.get("/v1/hsn/{code}", response_model=HSNCode)
def get_hsn(code: str):
    entry = get_hsn_lookup().get(code)
    if entry is None:
        logger.info("HSN lookup miss: %s", code)
        raise HTTPException(status_code=404, detail=f"HSN code not found: {code}")
    return entry


@app.get("/v1/reference/uom", response_model=List[str])
def list_uom():
    return list(UOM_OPTIONS)


@app.get("/v1/reference/transport-modes", response_model=List[str])
def list_transport_modes():
    return list(TRANSPORT_MODES)


@app.get("/v1/reference/states", response_model=List[IndianState])
def list_states():
    return list(INDIAN_STATES)
