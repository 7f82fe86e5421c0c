#!/usr/bin/env python3
"""
baseball: a command line app for getting the MLB schedule.

Usage:
    baseball schedule                 # today's games
    baseball schedule -d yesterday
    baseball schedule --date 2021-04-05
"""
import argparse
import logging
import logging.config
import sys
from datetime import date
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rich.console import Console
from rich.markup import escape

from baseball_cli import __version__
from baseball_cli.data_sources.api.stats_api import StatsApiClient
from baseball_cli.errors import BaseballCliError, ConfigError
from baseball_cli.renderers.schedule_table import ScheduleFormatter
from baseball_cli.utils.config_loader import load_config
from baseball_cli.utils.date_args import parse_date_arg

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baseball",
        description="A command line app for getting baseball schedule and standings",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Path to a YAML/JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    schedule = subparsers.add_parser("schedule", help="View the MLB schedule")
    schedule.add_argument(
        "-d", "--date", default="today",
        help="The date to view schedule data: yesterday, today, tomorrow or YYYY-MM-DD "
             "(default: today)")
    schedule.set_defaults(func=run_schedule)
    return parser


def configure_logging(cfg: dict, verbose: bool = False):
    if cfg.get("logging"):
        logging.config.dictConfig(cfg["logging"])
    if verbose:
        logging.getLogger("baseball_cli").setLevel(logging.DEBUG)


def display_timezone(cfg: dict):
    name = (cfg.get("display") or {}).get("timezone")
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown display timezone '{name}'") from e


def run_schedule(args, cfg: dict, clock=date.today, console: Console = None):
    game_date = parse_date_arg(args.date, clock=clock)
    tz = display_timezone(cfg)
    client = StatsApiClient.from_config(cfg)
    schedule = client.get_schedule(game_date)
    games = schedule.all_games()
    logger.info(f"{len(games)} game(s) scheduled for {game_date}")
    ScheduleFormatter(games, console=console, tz=tz).display()


def main(argv: Optional[List[str]] = None, clock=date.today,
         console: Console = None, err_console: Console = None) -> int:
    args = build_parser().parse_args(argv)
    err_console = err_console or Console(stderr=True)
    try:
        cfg = load_config(args.config)
        configure_logging(cfg, verbose=args.verbose)
        args.func(args, cfg, clock=clock, console=console)
    except BaseballCliError as e:
        logger.debug("Command failed", exc_info=True)
        err_console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
