"""Exports of an allocation result: plain-text report and tabular forms."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from engine.apportion_engine import CalculationResult

COLUMNS = ["id", "name", "count", "exact_share", "base_allocated", "remainder", "allocated", "reduction"]


def result_text(result: CalculationResult, total_limit: int, title: Optional[str] = None) -> str:
    """Format the result as a shareable plain-text report."""
    header = f"[{title}]" if title else "[Quota allocation result]"
    text = f"{header}\nTotal limit: {total_limit}\nTotal signup: {result.total_signup}\n\n"
    for r in result.data:
        text += f"* {r.name}\n   Requested: {r.count}\n   Approved: {r.allocated} (reduced by {r.reduction})\n\n"
    return text


def allocation_frame(result: CalculationResult) -> pd.DataFrame:
    """One row per unit, in input order."""
    records = [
        {
            "id": r.id,
            "name": r.name,
            "count": r.count,
            "exact_share": r.exact_share,
            "base_allocated": r.base_allocated,
            "remainder": r.remainder,
            "allocated": r.allocated,
            "reduction": r.reduction,
        }
        for r in result.data
    ]
    return pd.DataFrame(records, columns=COLUMNS)


def write_csv(result: CalculationResult, path: str | Path) -> None:
    allocation_frame(result).to_csv(path, index=False)
