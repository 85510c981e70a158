"""Apportionment engine.

Splits a fixed total limit across units in proportion to their signup counts
using the largest-remainder (Hamilton) method, so the allocations always add
up to exactly the limit when demand exceeds it.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from units.unit import Unit, total_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocationRow:
    """Allocation outcome for a single unit."""

    unit: Unit
    exact_share: float
    base_allocated: int
    remainder: float
    allocated: int
    reduction: int

    @property
    def id(self) -> str:
        return self.unit.id

    @property
    def name(self) -> str:
        return self.unit.name

    @property
    def count(self) -> int:
        return self.unit.count


@dataclass(frozen=True)
class CalculationResult:
    """Per-unit rows (in input order) plus aggregate totals."""

    data: Tuple[AllocationRow, ...]
    total_signup: int
    total_allocated: int
    excess: int
    is_over: bool


def total_signup(units: Sequence[Unit]) -> int:
    return total_count(units)


def _largest_remainder(units: Sequence[Unit], total_limit: int, signup: int) -> List[AllocationRow]:
    ratio = total_limit / signup
    shares = [u.count * ratio for u in units]
    bases = [math.floor(s) for s in shares]
    remainders = [s - b for s, b in zip(shares, bases)]

    remaining_spots = total_limit - sum(bases)
    # ties keep input order
    order = sorted(range(len(units)), key=lambda i: (-remainders[i], i))
    bonus = set(order[:max(remaining_spots, 0)])

    rows: List[AllocationRow] = []
    for i, u in enumerate(units):
        allocated = bases[i] + (1 if i in bonus else 0)
        rows.append(
            AllocationRow(
                unit=u,
                exact_share=shares[i],
                base_allocated=bases[i],
                remainder=remainders[i],
                allocated=allocated,
                reduction=u.count - allocated,
            )
        )
    logger.debug(
        "largest remainder: floor total %d, %d remainder seat(s) handed out",
        total_limit - remaining_spots,
        remaining_spots,
    )
    return rows


def allocate(units: Sequence[Unit], total_limit: int) -> CalculationResult:
    """Allocate ``total_limit`` seats across ``units`` proportionally.

    Cases, checked in order:
    - no signups or no capacity: nothing is allocated
    - signups fit within the limit: every unit gets its full count
    - over-subscribed: largest-remainder apportionment, summing to the limit

    The input sequence is never modified; a new result is built on each call.
    """
    signup = total_signup(units)

    if signup == 0 or total_limit <= 0:
        logger.debug("no allocation possible: signup=%d limit=%d", signup, total_limit)
        return CalculationResult(
            data=tuple(
                AllocationRow(u, exact_share=0.0, base_allocated=0, remainder=0.0, allocated=0, reduction=u.count)
                for u in units
            ),
            total_signup=signup,
            total_allocated=0,
            excess=signup,
            is_over=signup > 0,
        )

    if signup <= total_limit:
        logger.debug("within limit: signup=%d limit=%d", signup, total_limit)
        return CalculationResult(
            data=tuple(
                AllocationRow(
                    u,
                    exact_share=float(u.count),
                    base_allocated=u.count,
                    remainder=0.0,
                    allocated=u.count,
                    reduction=0,
                )
                for u in units
            ),
            total_signup=signup,
            total_allocated=signup,
            excess=0,
            is_over=False,
        )

    logger.debug("over limit: signup=%d limit=%d units=%d", signup, total_limit, len(units))
    return CalculationResult(
        data=tuple(_largest_remainder(units, total_limit, signup)),
        total_signup=signup,
        total_allocated=total_limit,
        excess=signup - total_limit,
        is_over=True,
    )
