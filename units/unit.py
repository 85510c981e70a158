from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


@dataclass(frozen=True)
class Unit:
    id: str
    name: str
    count: int  # signups

    @classmethod
    def from_pair(cls, text: str, index: int) -> "Unit":
        """Parse a NAME=COUNT pair; the id is derived from the position."""
        name, sep, raw = text.rpartition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid unit format: {text!r} (expected NAME=COUNT)")
        try:
            count = int(raw)
        except ValueError:
            raise ValueError(f"Invalid count for unit {name.strip()!r}: {raw!r}") from None
        return cls(id=f"u{index + 1}", name=name.strip(), count=count)


def build_units(rows: Iterable[Dict[str, Any]], start: int = 0) -> List[Unit]:
    units: List[Unit] = []
    for i, row in enumerate(rows, start):
        if "name" not in row:
            raise ValueError(f"Unit #{i + 1} is missing 'name'")
        try:
            count = int(row.get("count", 0))
        except (TypeError, ValueError):
            raise ValueError(f"Unit #{i + 1} has non-integer count: {row.get('count')!r}") from None
        uid = row.get("id")
        units.append(
            Unit(
                id=str(uid) if uid not in (None, "") else f"u{i + 1}",
                name="" if row["name"] is None else str(row["name"]).strip(),
                count=count,
            )
        )
    return units


def total_count(units: Iterable[Unit]) -> int:
    return sum(u.count for u in units)
