"""Command line entry point for ``nwx``.

Usage::

    nwx                                   # intro screen
    nwx version
    nwx config set endpoint https://api.example.com
    nwx aa config --endpoint http://localhost:3020
    nwx aa status
    nwx aa scanner create
    nwx interactive

Exit status is 0 on success, 1 on any error or cancellation and 2 when the
arguments cannot be parsed.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape

from nwx import __version__
from nwx.config import Config, EndpointStore
from nwx.errors import CancellationError, NwxError
from nwx.log_config import setup_logging
from nwx.menu import InteractiveMenu, show_intro_screen
from nwx.utils import console, print_error, print_success, print_warning
from nwx.workflow import ScannerCreationWorkflow, report_status

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("endpoint",)

AA_OVERVIEW = """\
Access Analyzer CLI
Available commands:
  nwx aa config     - Configuration management
  nwx aa status     - Test the connection to the Access Analyzer API
  nwx aa scanner    - Scanner management

Use 'nwx aa <command> --help' for more information about a command."""

AA_CONFIG_HELP = """\
Access Analyzer Configuration
Available options:
  --endpoint    Set the Access Analyzer API endpoint
  --show        Show current configuration

Examples:
  nwx aa config --endpoint="http://localhost:3020"
  nwx aa config --show"""

SCANNER_OVERVIEW = """\
Scanner Management
Available commands:
  nwx aa scanner create      - Create a new scanner interactively
  nwx aa scanner --create    - Same as above

Use 'nwx aa scanner <command> --help' for more information."""


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_intro(args: argparse.Namespace, config: Config) -> int:
    show_intro_screen()
    return 0


def cmd_usage(args: argparse.Namespace, config: Config) -> int:
    args.usage_parser.print_help()
    return 0


def cmd_version(args: argparse.Namespace, config: Config) -> int:
    console.print(f"nwx version {__version__}", highlight=False)
    return 0


def cmd_config_set(args: argparse.Namespace, config: Config) -> int:
    value = args.value.strip()
    EndpointStore(config).set_endpoint(value)
    print_success(f"✅ Endpoint set to: {escape(value)}")
    return 0


def cmd_config_get(args: argparse.Namespace, config: Config) -> int:
    endpoint = EndpointStore(config).get_endpoint()
    if endpoint:
        console.print(f"Current endpoint: {escape(endpoint)}", highlight=False)
    else:
        console.print("No endpoint configured")
    return 0


def cmd_config_list(args: argparse.Namespace, config: Config) -> int:
    console.print("Current configuration:")
    _print_endpoint_line(EndpointStore(config).get_endpoint)
    return 0


def cmd_aa(args: argparse.Namespace, config: Config) -> int:
    console.print(AA_OVERVIEW)
    return 0


def cmd_aa_config(args: argparse.Namespace, config: Config) -> int:
    store = EndpointStore(config)
    if args.endpoint is None and not args.show:
        console.print(AA_CONFIG_HELP)
        return 0

    if args.endpoint is not None:
        endpoint = args.endpoint.strip()
        if not endpoint:
            print_error("Error: endpoint must not be empty")
            return 1
        store.set_aa_endpoint(endpoint)
        print_success(f"✅ Access Analyzer endpoint set to: {escape(endpoint)}")
        if not args.show:
            print_warning("Run 'nwx aa status' to test the connection")

    if args.show:
        console.print("Access Analyzer Configuration:")
        _print_endpoint_line(store.get_aa_endpoint)
    return 0


def cmd_aa_status(args: argparse.Namespace, config: Config) -> int:
    return 0 if report_status(config) else 1


def cmd_aa_scanner(args: argparse.Namespace, config: Config) -> int:
    if args.create:
        return cmd_aa_scanner_create(args, config)
    console.print(SCANNER_OVERVIEW)
    return 0


def cmd_aa_scanner_create(args: argparse.Namespace, config: Config) -> int:
    ScannerCreationWorkflow(config).run()
    return 0


def cmd_interactive(args: argparse.Namespace, config: Config) -> int:
    InteractiveMenu(config).run()
    return 0


def _print_endpoint_line(read: Callable[[], str]) -> None:
    try:
        endpoint = read()
    except NwxError as exc:
        console.print(f"  endpoint: <error: {escape(str(exc))}>", highlight=False)
        return
    console.print(f"  endpoint: {escape(endpoint) or '<not configured>'}", highlight=False)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nwx",
        description="Netwrix CLI -- Access Analyzer scanner scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nwx aa config --endpoint http://localhost:3020\n"
            "  nwx aa scanner create\n"
            "  nwx interactive\n"
        ),
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.set_defaults(handler=cmd_intro)
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    version = commands.add_parser("version", help="Show version information")
    version.set_defaults(handler=cmd_version)

    # nwx config ...
    config = commands.add_parser("config", help="Configuration management")
    config.set_defaults(handler=cmd_usage, usage_parser=config)
    config_commands = config.add_subparsers(dest="config_command", metavar="<action>")

    config_set = config_commands.add_parser("set", help="Set a configuration value")
    config_set.add_argument("key", choices=CONFIG_KEYS)
    config_set.add_argument("value")
    config_set.set_defaults(handler=cmd_config_set)

    config_get = config_commands.add_parser("get", help="Get a configuration value")
    config_get.add_argument("key", choices=CONFIG_KEYS)
    config_get.set_defaults(handler=cmd_config_get)

    config_list = config_commands.add_parser("list", help="List all configuration")
    config_list.set_defaults(handler=cmd_config_list)

    # nwx access-analyzer ...
    aa = commands.add_parser(
        "access-analyzer", aliases=["aa"], help="Access Analyzer commands"
    )
    aa.set_defaults(handler=cmd_aa)
    aa_commands = aa.add_subparsers(dest="aa_command", metavar="<command>")

    aa_config = aa_commands.add_parser("config", help="Access Analyzer configuration")
    aa_config.add_argument("--endpoint", default=None, help="Set the Access Analyzer API endpoint")
    aa_config.add_argument("--show", action="store_true", help="Show current configuration")
    aa_config.set_defaults(handler=cmd_aa_config)

    aa_status = aa_commands.add_parser("status", help="Test the Access Analyzer connection")
    aa_status.set_defaults(handler=cmd_aa_status)

    scanner = aa_commands.add_parser("scanner", help="Scanner management")
    scanner.add_argument(
        "--create", action="store_true", help="Create a new scanner interactively"
    )
    scanner.set_defaults(handler=cmd_aa_scanner)
    scanner_commands = scanner.add_subparsers(dest="scanner_command", metavar="<command>")

    scanner_create = scanner_commands.add_parser("create", help="Create a new scanner")
    scanner_create.set_defaults(handler=cmd_aa_scanner_create)

    interactive = commands.add_parser("interactive", help="Start interactive CLI mode")
    interactive.set_defaults(handler=cmd_interactive)

    return parser


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``nwx`` and ``python -m nwx``."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = Config.from_env()
    except (ValueError, PydanticValidationError) as exc:
        print_error(f"Error: invalid environment configuration: {escape(str(exc))}")
        return 1

    try:
        return args.handler(args, config)
    except CancellationError:
        print_error("❌ Scanner creation cancelled by user")
        return 1
    except NwxError as exc:
        logger.debug("Command failed", exc_info=True)
        print_error(f"❌ Error: {escape(str(exc))}")
        return 1
