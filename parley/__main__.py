"""CLI for inspecting coalition bids and formation decisions.

Usage:
    python -m parley bids scenario.yaml
    python -m parley bids scenario.yaml --base-strength 0.4 --coalition-boost 0.5
    python -m parley form scenario.yaml --participant alice [--ally bob --ally carol]
    python -m parley --verbose bids scenario.yaml --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

from pydantic import ValidationError as PydanticValidationError

from parley.bidding.coalition import CoalitionBiddingStrategy
from parley.bidding.collect import collect_bids
from parley.config import BiddingConfig
from parley.errors import ParleyError
from parley.renderer import render_bids, render_decision
from parley.scenario import Scenario
from parley.social.formation import should_form_coalition


def cmd_bids(args: argparse.Namespace, config: BiddingConfig) -> None:
    """Compute one coalition bid per participant."""
    scenario = Scenario.from_yaml(args.scenario)

    strategy = CoalitionBiddingStrategy(
        base_strength=config.base_strength if args.base_strength is None else args.base_strength,
        coalition_boost=(
            config.coalition_boost if args.coalition_boost is None else args.coalition_boost
        ),
    )

    bids = asyncio.run(
        collect_bids(
            strategy,
            scenario.dialogue,
            scenario.participants,
            scenario.active_coalitions(),
        )
    )

    if args.json:
        print(json.dumps([asdict(bid) for bid in bids], indent=2))
    else:
        render_bids(bids)


def cmd_form(args: argparse.Namespace, config: BiddingConfig) -> None:
    """Check whether a participant should form a coalition."""
    scenario = Scenario.from_yaml(args.scenario)
    decision = should_form_coalition(scenario.dialogue, args.participant, args.ally or [])

    if args.json:
        print(json.dumps(asdict(decision), indent=2))
    else:
        render_decision(args.participant, decision)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parley",
        description="Coalition-aware turn bidding for multi-party dialogue",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    bids_parser = subparsers.add_parser("bids", help="Compute a bid for every participant")
    bids_parser.add_argument("scenario", help="Path to scenario YAML")
    bids_parser.add_argument("--base-strength", type=float, help="Override base bid strength")
    bids_parser.add_argument("--coalition-boost", type=float, help="Override coalition boost")
    bids_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    form_parser = subparsers.add_parser("form", help="Check for coalition formation")
    form_parser.add_argument("scenario", help="Path to scenario YAML")
    form_parser.add_argument("--participant", required=True, help="Participant to evaluate")
    form_parser.add_argument(
        "--ally",
        action="append",
        help="Restrict allies to this participant (repeatable)",
    )
    form_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = BiddingConfig()
    except PydanticValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {"bids": cmd_bids, "form": cmd_form}

    try:
        commands[args.command](args, config)
    except ParleyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
