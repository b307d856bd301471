"""Command-line entry point: run one ROI simulation and print the report."""

import argparse
import json
import logging
import sys

import yaml
from pydantic import ValidationError

from .config.loader import get_default_config, load_config
from .engine.models import AssetClass, Currency, SimulationInput
from .reporting.export import (
    export_csv,
    export_html_report,
    export_json,
    input_table,
    results_table,
)
from .simulation.runner import compute_simulation
from .validation.sanity_checks import validate_simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RWA settlement migration ROI simulator")

    parser.add_argument("--input", type=str, help="YAML/JSON file with simulation input")
    parser.add_argument("--config", type=str, help="YAML file overriding engine defaults")

    # ------------------------------------------------------------------
    # inline input
    # ------------------------------------------------------------------
    parser.add_argument("--aum", type=float)
    parser.add_argument("--currency", choices=[c.value for c in Currency], default="USD")
    parser.add_argument(
        "--asset-class", dest="asset_classes", action="append",
        choices=[ac.value for ac in AssetClass], help="Repeat for several asset classes"
    )
    parser.add_argument("--yield", dest="current_yield", type=float)
    parser.add_argument("--settlement-cycle", type=int)
    parser.add_argument("--frequency", dest="annual_transaction_frequency", type=float)
    parser.add_argument("--reinvestment-rate", dest="conservative_reinvestment_rate", type=float)
    parser.add_argument("--alpha", dest="differentiated_alpha", type=float)
    parser.add_argument("--legacy-cost", dest="legacy_settlement_costs", type=float)
    parser.add_argument("--collateralization-ratio", type=float)
    parser.add_argument("--borrowing-rate", type=float)
    parser.add_argument("--defi-reinvestment-rate", type=float)
    parser.add_argument("--use-defi", dest="use_defi_calculation", action="store_true")

    # ------------------------------------------------------------------
    # output
    # ------------------------------------------------------------------
    parser.add_argument("--language", choices=["en", "ja"], default="en")
    parser.add_argument("--json", action="store_true", help="Print raw result as JSON")
    parser.add_argument("--export-csv", type=str)
    parser.add_argument("--export-json", type=str)
    parser.add_argument("--export-html", type=str, help="HTML report with tables and charts")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


INPUT_FIELDS = [
    "aum", "currency", "asset_classes", "current_yield", "settlement_cycle",
    "annual_transaction_frequency", "conservative_reinvestment_rate",
    "differentiated_alpha", "legacy_settlement_costs", "collateralization_ratio",
    "borrowing_rate", "defi_reinvestment_rate", "use_defi_calculation",
]


def input_from_args(args: argparse.Namespace) -> SimulationInput:
    """Build a SimulationInput from --input or inline flags."""
    if args.input:
        with open(args.input, 'r') as f:
            data = yaml.safe_load(f)  # JSON is a subset of YAML
    else:
        data = {
            name: getattr(args, name)
            for name in INPUT_FIELDS
            if getattr(args, name) is not None
        }
        data.setdefault("asset_classes", [])
    return SimulationInput.from_dict(data)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Invalid config:\n{e}", file=sys.stderr)
        return 2

    try:
        sim_input = input_from_args(args)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Invalid input:\n{e}", file=sys.stderr)
        return 2

    result = compute_simulation(sim_input, config)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(input_table(sim_input, result, args.language, config).to_string(index=False))
        print()
        print(results_table(sim_input, result, args.language).to_string(index=False))

    for warning in validate_simulation(sim_input, result, config):
        print(f"[{warning.severity}] {warning.message}", file=sys.stderr)

    if args.export_csv:
        export_csv(result, args.export_csv)
    if args.export_json:
        export_json(sim_input, result, args.export_json, config)
    if args.export_html:
        export_html_report(sim_input, result, args.export_html, args.language, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
