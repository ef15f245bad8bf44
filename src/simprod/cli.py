from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import Limits, load_limits
from .errors import SimprodValidationError
from .plan import Plan, empty_plan
from .scenario import Scenario, empty_scenario

LOGGER = logging.getLogger(__name__)

DESCRIPTION = """\
Inspect the datasets of an energy production and transport network.

If the target is 'scenario', the scenario contained in FILE is loaded and
written back as JSON on stdout. Without FILE, an empty scenario is used.

If the target is 'plan', the plan contained in FILE is loaded and written
back as JSON on stdout. Without FILE, a plan over an empty timeline is used.
"""


def load_json(path: str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input JSON not found: {path}")
    return json.loads(p.read_text())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simprod",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to a JSON file overriding the capacity limits.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log loading details on stderr.",
    )
    targets = parser.add_subparsers(dest="target")

    scenario = targets.add_parser("scenario", help="Load and print a scenario.")
    scenario.add_argument("file", nargs="?", help="Path to a scenario JSON file.")
    scenario.add_argument(
        "--describe",
        action="store_true",
        help="Print a human-readable description instead of JSON.",
    )

    plan = targets.add_parser("plan", help="Load and print a production plan.")
    plan.add_argument("file", nargs="?", help="Path to a plan JSON file.")
    plan.add_argument(
        "--table",
        action="store_true",
        help="Print the productions as a table (one column per plant).",
    )
    return parser


def _process_scenario(args: argparse.Namespace, limits: Limits) -> str:
    if args.file is None:
        scenario = empty_scenario(limits)
    else:
        scenario = Scenario.from_json(load_json(args.file), limits)
    if args.describe:
        return scenario.describe()
    return json.dumps(scenario.to_json(), indent=2)


def _process_plan(args: argparse.Namespace) -> str:
    if args.file is None:
        plan = empty_plan()
    else:
        plan = Plan.from_json(load_json(args.file))
    if args.table:
        return plan.to_frame().to_string()
    return json.dumps(plan.to_json(), indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        limits = load_limits(args.config)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print("Config validation error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    try:
        if args.target == "scenario":
            output = _process_scenario(args, limits)
        else:
            output = _process_plan(args)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Problem while loading JSON file: {e}", file=sys.stderr)
        return 2
    except SimprodValidationError as e:
        LOGGER.debug("Rejected %s input", args.target, exc_info=True)
        print(f"Invalid {args.target}: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
