import re
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from baseball_cli.errors import InvalidDateArgument

Clock = Callable[[], date]

RELATIVE_OFFSETS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}

# strptime alone accepts "2021-4-5", so the shape is checked first
ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DateArgParser:
    """
    Validates and normalizes the --date token.

    Accepts the relative keywords yesterday/today/tomorrow or a calendar date
    written as YYYY-MM-DD. Relative keywords are resolved against an injected
    clock so callers (and tests) control what "today" means.
    """

    @staticmethod
    def is_valid(token: Optional[str]) -> bool:
        if not token:
            return False
        if token in RELATIVE_OFFSETS:
            return True
        if not ISO_DATE_RE.fullmatch(token):
            return False
        try:
            datetime.strptime(token, "%Y-%m-%d")
        except ValueError:
            return False
        return True

    @staticmethod
    def format_date(token: str, clock: Clock = date.today) -> str:
        """
        Resolve a valid token to an ISO date string.

        Args:
            token (str): A token for which is_valid() returned True.
            clock (callable): Returns the reference "today" date.

        Returns:
            str: Date in 'YYYY-MM-DD' format.
        """
        if token in RELATIVE_OFFSETS:
            return (clock() + timedelta(days=RELATIVE_OFFSETS[token])).isoformat()
        return date.fromisoformat(token).isoformat()


def parse_date_arg(token: Optional[str], clock: Clock = date.today) -> str:
    """Validate and format a --date token, raising InvalidDateArgument if bad."""
    if not DateArgParser.is_valid(token):
        raise InvalidDateArgument(token)
    return DateArgParser.format_date(token, clock=clock)
