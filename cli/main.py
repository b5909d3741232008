"""CLI entry point and argument parsing"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

import settings
from config.loader import get_config_loader
from utils.errors import OuraClawError
from utils.storage import CredentialStore, EnvFileCredentialStore
from cli.handlers import handle_auth, handle_score, handle_sleep

# User-facing messages go to stderr, stdout carries only JSON
console = Console(stderr=True)

COMMANDS = ("auth", "score", "sleep")

USAGE = """Usage: ouraclaw <command> [options]

Commands:
  auth     Authenticate with Oura (OAuth2 flow)
  score    Fetch daily sleep scores (JSON)
  sleep    Fetch detailed sleep sessions (JSON)

Options:
  --start, -s <date>   Start date (YYYY-MM-DD)
  --end,   -e <date>   End date (YYYY-MM-DD)
  --debug, -d          Enable debug logging
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ouraclaw",
        usage=argparse.SUPPRESS,
        description=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--start", "-s", default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", "-e", default=None, help="End date (YYYY-MM-DD)")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    return parser


def setup_logging(debug: bool = False) -> None:
    """Configure root logging on stderr"""
    level = logging.DEBUG if debug else getattr(logging, str(settings.LOG_LEVEL).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(console_handler)


async def run_command(args: argparse.Namespace, store: CredentialStore) -> Optional[str]:
    """Dispatch a parsed command, returning output for stdout if any"""
    if args.command == "auth":
        await handle_auth(store, console)
        return None
    if args.command == "score":
        return await handle_score(store, args.start, args.end)
    if args.command == "sleep":
        return await handle_sleep(store, args.start, args.end)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None, store: Optional[CredentialStore] = None) -> int:
    """Entry point for the CLI

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    if args.command not in COMMANDS:
        sys.stderr.write(USAGE)
        return 1

    setup_logging(args.debug)

    if store is None:
        store = EnvFileCredentialStore(get_config_loader().env_path)

    try:
        output = asyncio.run(run_command(args, store))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        return 130
    except OuraClawError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {escape(str(e))}")
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1

    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
