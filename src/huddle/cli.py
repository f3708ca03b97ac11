"""Command-line interface for Huddle - runs the TUI and manages settings"""

import argparse
import json
from typing import Any, Optional, Sequence

from rich.console import Console

from . import __version__
from .utils.config_manager import get_config_manager
from .utils.errors import HuddleError, format_error_message
from .utils.logging import get_logger, init_logging

console = Console()
logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


## Parser


def setup_argument_parser() -> argparse.ArgumentParser:
    """Configure and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="huddle",
        description="Terminal team chat with a rich text message editor.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--channel", help="Channel to open (default: workspace default_channel)")
    parser.add_argument("--name", help="Display name to post as (default: workspace display_name)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for app.log (default: logging.log_level from config)",
    )

    subparsers = parser.add_subparsers(dest="command")

    config_parser = subparsers.add_parser(
        "config",
        help="Show or change settings",
        description="Show, change or reset the settings stored in config.json",
    )
    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        required=True,
        help="Configuration operation to perform",
    )
    config_subparsers.add_parser("show", help="Print the current settings as JSON")

    get_parser = config_subparsers.add_parser("get", help="Print a single setting")
    get_parser.add_argument("key", help="Dot-separated key, e.g. editor.placeholder")

    set_parser = config_subparsers.add_parser("set", help="Change a setting")
    set_parser.add_argument("key", help="Dot-separated key, e.g. editor.show_toolbar")
    set_parser.add_argument("value", help="New value, parsed as JSON when possible")

    config_subparsers.add_parser("reset", help="Restore the default settings")

    return parser


def parse_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


## Commands


def run_config_command(args: argparse.Namespace) -> int:
    manager = get_config_manager()

    match args.config_command:
        case "show":
            console.print_json(data=manager.config.model_dump())
        case "get":
            missing = object()
            value = manager.get_config(args.key, missing)
            if value is missing:
                console.print(f"[red]Unknown setting: {args.key}[/]")
                return 1
            if hasattr(value, "model_dump"):
                value = value.model_dump()
            console.print_json(data=value)
        case "set":
            manager.set_config(args.key, parse_value(args.value))
            console.print(f"[green]{args.key} updated[/]")
        case "reset":
            backup = manager.backup_config()
            manager.reset_to_defaults()
            console.print(f"[green]Settings reset to defaults[/] (backup: {backup})")

    return 0


def run_app(args: argparse.Namespace) -> int:
    from .tui.app import HuddleApp

    config = get_config_manager().config

    if args.channel and args.channel not in config.workspace.channels:
        available = ", ".join(config.workspace.channels)
        console.print(f"[red]Unknown channel '{args.channel}'. Available: {available}[/]")
        return 2

    log_manager = init_logging(
        args.log_level or config.logging.log_level,
        max_bytes=config.logging.max_file_size,
        backup_count=config.logging.backup_count,
    )
    log_manager.use_tui_handler()

    logger.info("Starting Huddle")
    HuddleApp(channel=args.channel, display_name=args.name).run()
    logger.info("Huddle closed")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "config":
            return run_config_command(args)
        return run_app(args)

    except HuddleError as e:
        logger.error(f"Command failed: {e.message}")
        console.print(f"[red]{format_error_message(e)}[/]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
