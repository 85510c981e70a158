"""Caller-side checks on unit lists.

The apportionment engine assumes well-formed input; anything that builds
units from user input runs these first.
"""
from __future__ import annotations

from typing import List, Sequence

from units.unit import Unit


class UnitValidationError(ValueError):
    """Raised when a unit list cannot be handed to the engine."""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("; ".join(self.issues))


def validate_units(units: Sequence[Unit]) -> List[str]:
    issues: List[str] = []
    seen: set[str] = set()
    for u in units:
        if not u.name.strip():
            issues.append(f"Unit {u.id} has a blank name")
        if u.count < 0:
            issues.append(f"Negative count for {u.name or u.id}: {u.count}")
        if u.id in seen:
            issues.append(f"Duplicate unit id: {u.id}")
        seen.add(u.id)
    return issues


def ensure_valid(units: Sequence[Unit]) -> None:
    issues = validate_units(units)
    if issues:
        raise UnitValidationError(issues)
