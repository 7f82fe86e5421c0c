# schedule_schema.py
"""Shape of the MLB Stats API /schedule response (hydrate=team,linescore)."""

from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
)


def _require_timestamp_string(value):
    if not isinstance(value, str):
        raise ValueError("expected an ISO 8601 timestamp string")
    return value


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Stats API timestamps look like 2021-04-05T23:05:00Z; no offset means UTC
ApiDateTime = Annotated[datetime, BeforeValidator(_require_timestamp_string),
                        AfterValidator(_assume_utc)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class LeagueRecord(_Record):
    wins: StrictInt
    losses: StrictInt
    pct: StrictStr


class TeamInfo(_Record):
    id: StrictInt
    name: StrictStr
    teamName: StrictStr
    abbreviation: StrictStr


class TeamSide(_Record):
    leagueRecord: LeagueRecord
    score: Optional[StrictInt] = None
    team: TeamInfo


class Teams(_Record):
    away: TeamSide
    home: TeamSide


class LinescoreTeam(_Record):
    runs: Optional[StrictInt] = None


class LinescoreTeams(_Record):
    home: LinescoreTeam = Field(default_factory=LinescoreTeam)
    away: LinescoreTeam = Field(default_factory=LinescoreTeam)


class Linescore(_Record):
    # Every level is optional: games that have not started carry little or nothing
    scheduledInnings: Optional[StrictInt] = None
    currentInning: Optional[StrictInt] = None
    inningHalf: Optional[StrictStr] = None
    teams: LinescoreTeams = Field(default_factory=LinescoreTeams)


class GameStatus(_Record):
    # Extra status fields (codedGameState, reason, ...) are kept but unused
    model_config = ConfigDict(frozen=True, extra="allow")

    abstractGameCode: Literal["F", "L", "O", "P"]
    startTimeTBD: StrictBool
    statusCode: Optional[StrictStr] = None
    detailedState: Optional[StrictStr] = None


class Venue(_Record):
    id: StrictInt
    name: StrictStr


class Game(_Record):
    gamePk: StrictInt
    gameDate: ApiDateTime
    rescheduleDate: Optional[ApiDateTime] = None
    status: GameStatus
    linescore: Linescore = Field(default_factory=Linescore)
    teams: Teams
    venue: Venue


class ScheduleDate(_Record):
    date: StrictStr
    games: List[Game]


class ScheduleResponse(_Record):
    dates: List[ScheduleDate]

    def all_games(self) -> List[Game]:
        """Flatten the date buckets into one list, keeping API order."""
        return [game for bucket in self.dates for game in bucket.games]
