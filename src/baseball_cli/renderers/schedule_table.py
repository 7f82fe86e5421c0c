"""
Terminal rendering of a day's MLB schedule.

GameView turns one validated Game into display strings (rich markup);
ScheduleFormatter lays the views out as a borderless table, one row per game,
in the order the API returned them.
"""

import logging
from datetime import datetime, tzinfo
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from baseball_cli.schema.schedule_schema import Game, TeamSide
from baseball_cli.utils.helpers import starts_with

logger = logging.getLogger(__name__)

REGULATION_INNINGS = 9
# Detailed status codes for postponed (D*) and cancelled (C*) games
POSTPONED_STATUS_PREFIXES = ("D", "C")

Row = Tuple[str, str, str]


def highlight(text) -> str:
    return f"[yellow]{text}[/yellow]"


def dim(text) -> str:
    return f"[dim]{text}[/dim]"


def format_clock_time(dt: datetime) -> str:
    """12-hour clock without a leading zero, e.g. '7:05 PM'."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def team_record(side: TeamSide) -> str:
    return f"{side.leagueRecord.wins}-{side.leagueRecord.losses}"


def team_overview(side: TeamSide) -> str:
    return f"{escape(side.team.teamName)} {dim(team_record(side))}"


class GameView:
    """Read-only display projection over a single Game; nothing is cached."""

    def __init__(self, game: Game, tz: Optional[tzinfo] = None):
        self.game = game
        self.tz = tz

    @property
    def effective_date(self) -> datetime:
        return self.game.rescheduleDate or self.game.gameDate

    @property
    def is_live(self) -> bool:
        return self.game.status.abstractGameCode == "L"

    @property
    def is_final(self) -> bool:
        return self.game.status.abstractGameCode == "F"

    @property
    def is_postponed(self) -> bool:
        return starts_with(self.game.status.statusCode, POSTPONED_STATUS_PREFIXES)

    @property
    def has_started(self) -> bool:
        return self.is_live or (self.is_final and not self.is_postponed)

    @property
    def away_runs(self) -> int:
        return self.game.linescore.teams.away.runs or 0

    @property
    def home_runs(self) -> int:
        return self.game.linescore.teams.home.runs or 0

    @property
    def time(self) -> str:
        status = self.game.status
        if self.is_postponed:
            return escape(status.detailedState or "")
        if status.startTimeTBD:
            return "TBD"
        local = self.effective_date.astimezone(self.tz)
        return format_clock_time(local)

    @property
    def score(self) -> str:
        away, home = self.away_runs, self.home_runs
        if away > home:
            return f"{highlight(away)}\n{home}"
        if home > away:
            return f"{away}\n{highlight(home)}"
        return f"{away}\n{home}"

    @property
    def inning(self) -> str:
        linescore = self.game.linescore
        if self.is_postponed:
            return ""
        if self.is_final:
            if linescore.currentInning in (None, REGULATION_INNINGS):
                return "Final"
            return f"Final/{linescore.currentInning}"
        if self.is_live:
            half = escape(linescore.inningHalf or "")
            return f"{half} {linescore.currentInning or ''}".strip()
        return ""

    @property
    def matchup(self) -> str:
        teams = self.game.teams
        return f"{team_overview(teams.away)}\n{team_overview(teams.home)}"

    def to_row(self) -> Row:
        return (
            self.matchup,
            self.score if self.has_started else self.time,
            self.inning,
        )


class ScheduleFormatter:
    """
    Renders a list of games as a single table.

    Args:
        games: Validated games in display order.
        console: rich Console to print to (stdout by default).
        tz: Zone used for start times; None means the local zone.
    """

    def __init__(self, games: Sequence[Game], console: Console = None,
                 tz: Optional[tzinfo] = None):
        self.games = list(games)
        self.console = console or Console()
        self.tz = tz

    def rows(self) -> List[Row]:
        return [GameView(game, tz=self.tz).to_row() for game in self.games]

    def build_table(self) -> Table:
        table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 2, 1, 0))
        for _ in range(3):
            table.add_column()
        for row in self.rows():
            table.add_row(*row)
        return table

    def display(self):
        logger.debug(f"Rendering {len(self.games)} game(s)")
        self.console.print(self.build_table())
