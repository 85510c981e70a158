"""Fair quota CLI.

Provides commands for:
- allocate: Split a total limit across units by signup count
- validate: Check unit input without allocating
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from common.config_loader import load_session, load_units_csv
from common.logging_setup import configure_logging
from engine.apportion_engine import allocate
from engine.explanation_engine import explain_rows
from reporting.export import allocation_frame, result_text, write_csv
from reporting.summary import allocation_summary
from units.unit import Unit
from units.validation import ensure_valid, validate_units


def gather_units(args) -> Tuple[Optional[str], Optional[int], List[Unit]]:
    """Collect title, limit and units from session file, CSV and --unit pairs."""
    title: Optional[str] = None
    limit: Optional[int] = None
    units: List[Unit] = []

    if args.session:
        session = load_session(args.session)
        title = session.title
        limit = session.total_limit
        units.extend(session.units)

    if args.units_csv:
        units.extend(load_units_csv(args.units_csv, start=len(units)))

    for item in args.unit or []:
        units.append(Unit.from_pair(item, len(units)))

    if getattr(args, "limit", None) is not None:
        limit = args.limit
    if getattr(args, "title", None):
        title = args.title

    return title, limit, units


def cmd_allocate(args) -> int:
    """Handle allocate command: proportional quota allocation."""
    try:
        title, limit, units = gather_units(args)
        if limit is None:
            print("Error: --limit is required when no session file provides total_limit")
            return 1
        ensure_valid(units)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    result = allocate(units, limit)

    if args.format == "csv":
        if args.output:
            write_csv(result, args.output)
            print(f"Allocation written to {args.output}")
        else:
            print(allocation_frame(result).to_csv(index=False), end="")
        return 0

    if args.format == "text":
        text = result_text(result, limit, title)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
            print(f"Allocation written to {args.output}")
        else:
            print(text, end="")
        return 0

    print(f"Quota Allocation: {title}" if title else "Quota Allocation")
    print("=" * 50)

    print("\nSummary:")
    for k, v in allocation_summary(result, limit).items():
        if k == "ratio":
            print(f"  {k}: {v:.2%}" if v is not None else f"  {k}: -")
        else:
            print(f"  {k}: {v}")

    if result.data:
        print("\nUnits:")
        if args.explain:
            lines = explain_rows(result)
        else:
            lines = [f"{r.name:20} {r.count:>6} -> {r.allocated:>6}  (-{r.reduction})" for r in result.data]
        for line in lines:
            print("  " + line)
    else:
        print("\nNo units to allocate.")

    if result.is_over and result.total_allocated == 0:
        print("\nNo allocation possible: total limit is zero or negative.")

    return 0


def cmd_validate(args) -> int:
    """Handle validate command: report unit input issues."""
    try:
        _, _, units = gather_units(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    issues = validate_units(units)
    if issues:
        print("Issues:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"{len(units)} unit(s) OK")
    return 0


def main():
    """Main entry point."""
    p = argparse.ArgumentParser(
        prog="cli.main",
        description="Fair quota CLI: largest-remainder allocation of a limited quota",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common input arguments
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--session", default=None, help="YAML file with title, total_limit and units")
    common.add_argument("--units-csv", default=None, help="CSV file with name,count (optional id) columns")
    common.add_argument(
        "--unit",
        action="append",
        help="Unit as NAME=COUNT (repeatable, e.g., --unit Sales=45)",
    )

    # Allocate command
    alloc = sub.add_parser(
        "allocate",
        parents=[common],
        help="Allocate a total limit across units",
    )
    alloc.add_argument("--limit", type=int, default=None, help="Total limit (overrides the session file)")
    alloc.add_argument("--title", default=None, help="Title for the report")
    alloc.add_argument(
        "--format",
        choices=["table", "text", "csv"],
        default="table",
        help="Output format: table (console), text (shareable report) or csv",
    )
    alloc.add_argument("--output", default=None, help="Write text/csv output to this path")
    alloc.add_argument(
        "--explain",
        action="store_true",
        help="Show exact share and remainder for each unit",
    )
    alloc.set_defaults(func=cmd_allocate)

    # Validate command
    val = sub.add_parser(
        "validate",
        parents=[common],
        help="Validate unit input",
    )
    val.set_defaults(func=cmd_validate)

    args = p.parse_args()
    configure_logging(args.log_level)
    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main()
