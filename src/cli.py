"""CLI for solving an IRR locally, without the API.

Usage:
    python -m src.cli --spending 100 0 --income 0 110
    python -m src.cli --spending 1000 0 0 --income 0 500 700 --json
    python -m src.cli --spending 100 0 0 --income 0 0 121 --tolerance 0
"""

import argparse
import json
import math
import sys

from src.config import settings
from src.engine.resolver import resolve_irr
from src.models.cashflow import IRRResult


def print_result(result: IRRResult) -> None:
    print(f"\n{'=' * 60}")
    print("  Internal Rate of Return")
    print(f"{'=' * 60}")
    if result.ok:
        print(f"  IRR:              {result.irr:.4f}%")
    else:
        print(f"  IRR:              N/A ({result.error})")
    if result.discount_factor:
        print(f"  Discount factor:  {result.discount_factor:.6f}")
    if not math.isnan(result.npv_residual):
        print(f"  NPV at IRR:       {result.npv_residual:.3e}")
    roots = ", ".join(f"{r:.6f}" for r in result.roots) or "none"
    print(f"  Real roots:       {roots}")
    print()


def result_to_dict(result: IRRResult) -> dict:
    return {
        "status": int(result.status),
        "irr": None if math.isnan(result.irr) else result.irr,
        "error": result.error,
        "roots": result.roots,
        "discount_factor": result.discount_factor,
        "npv_residual": None if math.isnan(result.npv_residual) else result.npv_residual,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve IRR from spending and income series")
    parser.add_argument("--spending", type=float, nargs="+", required=True, help="Outflow per period")
    parser.add_argument("--income", type=float, nargs="+", required=True, help="Inflow per period")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=settings.root_imag_tolerance,
        help=f"Imaginary-part tolerance for real roots (default: {settings.root_imag_tolerance})",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args(argv)

    try:
        result = resolve_irr(
            args.spending,
            args.income,
            tolerance=args.tolerance,
            max_periods=settings.max_periods,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.json:
        print(json.dumps(result_to_dict(result)))
    else:
        print_result(result)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
