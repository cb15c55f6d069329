from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Sequence

from engcalc.core.config import get_settings
from engcalc.core.exceptions import AppError
from engcalc.services.engine import FormulaService
from engcalc.services.formulas_http import FormulaHttpService

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
logger = logging.getLogger("calculate")


def parse_assignments(assignments: Sequence[str]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into an input mapping; repeated keys collect into lists."""
    inputs: dict[str, Any] = {}
    for assignment in assignments:
        key, separator, value = assignment.partition("=")
        key = key.strip()
        if not separator or not key:
            raise ValueError(f"Expected key=value, got {assignment!r}")
        if key in inputs:
            existing = inputs[key]
            inputs[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            inputs[key] = value
    return inputs


def list_catalog(category: str | None) -> List[str]:
    service = FormulaService()
    lines = []
    for descriptor in service.list_formulas(category):
        marker = "*" if descriptor.evaluable else " "
        variables = ", ".join(descriptor.variables)
        lines.append(f"{marker} {descriptor.id:<28} [{descriptor.category}] {descriptor.title} ({variables})")
    return lines


def build_evaluator(mode: str) -> FormulaService | FormulaHttpService:
    if mode == "http":
        return FormulaHttpService.from_settings()
    return FormulaService()


def check_remote() -> int:
    try:
        service = FormulaHttpService.from_settings()
    except AppError as exc:
        logger.error("Cannot check remote API: %s", exc.message)
        return 2

    health = service.check_health()
    info = service.get_api_info()
    print(json.dumps({"health": health.model_dump(), "info": info.model_dump()}, ensure_ascii=False, indent=2))
    return 0 if health.success else 1


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate an engineering formula and show the work.")
    parser.add_argument("formula", nargs="?", help="Formula identifier, e.g. grade-percent.")
    parser.add_argument("inputs", nargs="*", help="Inputs as key=value pairs, e.g. rise=10 run=100.")
    parser.add_argument(
        "--mode",
        choices=["local", "http"],
        default=None,
        help="Evaluate locally or through the remote API (default: CALC_MODE setting).",
    )
    parser.add_argument(
        "--list",
        dest="list_category",
        nargs="?",
        const="",
        default=None,
        metavar="CATEGORY",
        help="List catalog formulas, optionally for one category. Evaluable ones are marked with *.",
    )
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON.")
    parser.add_argument(
        "--health",
        action="store_true",
        help="Check the remote calculation API (CALC_HTTP_BASE_URL) and print its info.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    if args.health:
        return check_remote()

    if args.list_category is not None:
        for line in list_catalog(args.list_category or None):
            print(line)
        return 0

    if not args.formula:
        print("A formula identifier is required (see --list).", file=sys.stderr)
        return 2

    try:
        inputs = parse_assignments(args.inputs)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    mode = args.mode or ("http" if get_settings().uses_remote_calculator else "local")
    try:
        evaluator = build_evaluator(mode)
    except AppError as exc:
        logger.error("Cannot build %s evaluator: %s", mode, exc.message)
        return 2

    result = evaluator.evaluate(args.formula, inputs)
    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    elif result.ok:
        print(result.derivation)
        print()
        print(json.dumps(result.data, ensure_ascii=False, indent=2))
    else:
        print(f"{result.kind.value}: {result.message}", file=sys.stderr)

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
