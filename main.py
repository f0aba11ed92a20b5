"""CLI entry point for the leveling party planner."""

import argparse
import logging
import sys

import requests

from xivparty.core.config import Settings
from xivparty.core.schemas import MIN_PARTY_SIZE, Party
from xivparty.lodestone.client import XIVAPIClient
from xivparty.lodestone.collector import (
    collect_party,
    fetch_party_members,
    resolve_server,
)
from xivparty.pipeline.orchestrator import export_configurations_json, run_search
from xivparty.pipeline.presenter import present

DEFAULT_CONFIG = "config/settings.yaml"

_HANDLED_ERRORS = (FileNotFoundError, ValueError, LookupError, requests.RequestException)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the most evenly leveled party composition for leveling together",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- plan subcommand (default) ---
    plan_parser = subparsers.add_parser("plan", help="Search and rank party configurations")
    plan_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG} if present)",
    )
    plan_parser.add_argument(
        "--party",
        default=None,
        help="Load the party from a YAML file instead of looking characters up",
    )
    plan_parser.add_argument(
        "--export",
        choices=["json"],
        help="Print every configuration in the given format instead of paging",
    )
    plan_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- fetch-party subcommand ---
    fetch_parser = subparsers.add_parser(
        "fetch-party",
        help="Look characters up and save them as a party YAML file",
    )
    fetch_parser.add_argument("--server", required=True, help="Server (world) name")
    fetch_parser.add_argument(
        "--character",
        action="append",
        required=True,
        dest="characters",
        help="Character name (repeat for each member, 2-4 total)",
    )
    fetch_parser.add_argument(
        "--output",
        default="config/party.yaml",
        help="Output path for party YAML (default: config/party.yaml)",
    )
    fetch_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG} if present)",
    )
    fetch_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- top-level flags for plan ---
    parser.add_argument("--config", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--party", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--export", choices=["json"], help=argparse.SUPPRESS)
    parser.add_argument("--verbose", "-v", action="store_true", help=argparse.SUPPRESS)

    args = parser.parse_args(argv)

    # Default to plan when no subcommand given
    if args.command is None:
        args.command = "plan"

    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_party(settings: Settings, party_path: str | None) -> Party | None:
    """Load the party from a file, or look the members up interactively.

    Returns None when fewer than two characters were collected.
    """
    if party_path is not None:
        return Party.from_yaml(party_path)

    with XIVAPIClient(settings.api) as client:
        server = resolve_server(client, settings.party.server)
        if settings.party.characters:
            members = fetch_party_members(client, server, settings.party.characters)
        else:
            members = collect_party(client, server)

    if len(members) < MIN_PARTY_SIZE:
        return None
    return Party(members=tuple(members))


def cmd_plan(args: argparse.Namespace) -> int:
    """Handle plan subcommand. Returns the process exit code."""
    settings = Settings.load(args.config, DEFAULT_CONFIG)
    party = load_party(settings, args.party)
    if party is None:
        print("Party must consist of at least two characters!", file=sys.stderr)
        return 1

    print("Determining best possible party configurations for levelling...\n")
    result = run_search(party)

    if args.export == "json":
        print(export_configurations_json(party, result.store.drain()))
        return 0

    if not result.store:
        print("No valid party configuration found.")
        return 0

    present(party, result.store)
    return 0


def cmd_fetch_party(args: argparse.Namespace) -> None:
    """Handle fetch-party subcommand."""
    settings = Settings.load(args.config, DEFAULT_CONFIG)
    with XIVAPIClient(settings.api) as client:
        if args.server not in client.list_servers():
            msg = f"Server {args.server} does not exist"
            raise ValueError(msg)
        members = fetch_party_members(client, args.server, args.characters)

    party = Party(members=tuple(members))
    party.to_yaml(args.output)
    print(f"Party written to {args.output}")
    for member in party.members:
        print(f"  {member.display_name}: {len(member.jobs)} combat jobs")
    print(f"Review the party and then run: python main.py plan --party {args.output}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "fetch-party":
        try:
            cmd_fetch_party(args)
        except _HANDLED_ERRORS as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        # plan (default)
        try:
            code = cmd_plan(args)
        except _HANDLED_ERRORS as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if code:
            sys.exit(code)


if __name__ == "__main__":
    main()
