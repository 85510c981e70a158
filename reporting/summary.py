from __future__ import annotations
from typing import Dict, Any
from engine.apportion_engine import CalculationResult

def allocation_summary(result: CalculationResult, total_limit: int) -> Dict[str, Any]:
    return {
        "total_limit": total_limit,
        "total_signup": result.total_signup,
        "total_allocated": result.total_allocated,
        "excess": result.excess,
        "is_over": result.is_over,
        "ratio": total_limit / result.total_signup if result.is_over and total_limit > 0 else None,
        "units": len(result.data),
    }
