from __future__ import annotations
from typing import List
from engine.apportion_engine import CalculationResult

def explain_rows(result: CalculationResult) -> List[str]:
    lines = []
    for r in result.data:
        extra = "  +1 remainder seat" if r.allocated > r.base_allocated else ""
        lines.append(
            f"{r.name}: requested {r.count}, share {r.exact_share:.2f} "
            f"(floor {r.base_allocated}, remainder {r.remainder:.2f}) -> {r.allocated}"
            f", reduced by {r.reduction}{extra}"
        )
    return lines
