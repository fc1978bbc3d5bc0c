from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from ..schemas import IndianState


def _reference_path() -> Path:
    """
    reference.yaml ships next to this module.
    """
    return Path(__file__).resolve().parent / "reference.yaml"


@lru_cache(maxsize=None)
def load_reference(path: str | Path | None = None) -> Dict:
    """
    Load and cache the YAML reference lists.
    """
    target = Path(path) if path else _reference_path()
    with target.open("r", encoding="utf-8") as fp:
        return yaml.safe_load(fp) or {}


_ref = load_reference()

UOM_OPTIONS: Tuple[str, ...] = tuple(str(u) for u in _ref.get("uom", []))
TRANSPORT_MODES: Tuple[str, ...] = tuple(str(m) for m in _ref.get("transport_modes", []))
INDIAN_STATES: Tuple[IndianState, ...] = tuple(
    IndianState(name=str(s["name"]), code=str(s["code"]).zfill(2)) for s in _ref.get("states", [])
)

_BY_CODE = {s.code: s for s in INDIAN_STATES}
_BY_NAME = {s.name.lower(): s for s in INDIAN_STATES}


def state_by_code(code: Optional[str]) -> Optional[IndianState]:
    if not code:
        return None
    return _BY_CODE.get(str(code).strip().zfill(2))


def state_by_name(name: Optional[str]) -> Optional[IndianState]:
    if not name:
        return None
    return _BY_NAME.get(name.strip().lower())


def state_code_for(name: Optional[str]) -> Optional[str]:
    state = state_by_name(name)
    return state.code if state else None
