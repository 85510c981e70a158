from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import pandas as pd
import yaml

from units.unit import Unit, build_units

logger = logging.getLogger(__name__)

def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

@dataclass(frozen=True)
class LoadedSession:
    title: Optional[str]
    total_limit: int
    units: List[Unit]

def load_session(path: str | Path) -> LoadedSession:
    raw = load_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Session file must contain a mapping: {path}")
    try:
        total_limit = int(raw.get("total_limit", 0))
    except (TypeError, ValueError):
        raise ValueError(f"total_limit must be an integer, got {raw.get('total_limit')!r}") from None
    units = build_units(raw.get("units") or [])
    logger.info("Loaded session %s: %d unit(s), limit %d", path, len(units), total_limit)
    return LoadedSession(title=raw.get("title"), total_limit=total_limit, units=units)

def load_units_csv(path: str | Path, start: int = 0) -> List[Unit]:
    df = pd.read_csv(path)
    missing = [c for c in ("name", "count") if c not in df.columns]
    if missing:
        raise ValueError(f"CSV must contain {', '.join(repr(c) for c in missing)} column(s)")
    df = df.astype(object).where(df.notna(), None)
    units = build_units(df.to_dict(orient="records"), start)
    logger.info("Loaded %d unit(s) from %s", len(units), path)
    return units
