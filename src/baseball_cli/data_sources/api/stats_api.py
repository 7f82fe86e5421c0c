# File: baseball_cli/data_sources/api/stats_api.py
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from baseball_cli.errors import NetworkError, SchemaValidationError
from baseball_cli.schema.schedule_schema import ScheduleResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://statsapi.mlb.com/api/v1"


class StatsApiClient:
    BASE_URL = DEFAULT_BASE_URL

    def __init__(self,
                 base_url: str = None,
                 sport_id: int = 1,
                 hydrate: str = "team,linescore",
                 timeout: Optional[float] = None):
        """
        Initialize the StatsApiClient.
        :param base_url: Stats API root, defaults to the public v1 endpoint.
        :param sport_id: Stats API sport id (1 = MLB).
        :param hydrate: Extra objects the API should embed in each game.
        :param timeout: Request timeout in seconds, None for no timeout.
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.sport_id = sport_id
        self.hydrate = hydrate
        self.timeout = timeout
        self.session = requests.Session()

    @classmethod
    def from_config(cls, cfg: dict) -> "StatsApiClient":
        api_cfg = cfg.get("mlb_stats_api") or {}
        return cls(
            base_url=api_cfg.get("base_url"),
            sport_id=api_cfg.get("sport_id", 1),
            hydrate=api_cfg.get("hydrate", "team,linescore"),
            timeout=api_cfg.get("timeout"),
        )

    def get_schedule(self, date: str) -> ScheduleResponse:
        """
        Fetch and validate the schedule for a single date.
        :param date: Date in 'YYYY-MM-DD' format.
        :return: The validated ScheduleResponse.
        :raises NetworkError: the request failed or returned a non-2xx status.
        :raises SchemaValidationError: the body is not JSON or not schedule-shaped.
        """
        url = f"{self.base_url}/schedule"
        params = {"sportId": self.sport_id, "hydrate": self.hydrate, "date": date}
        logger.info(f"Fetching MLB schedule for {date}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch schedule for {date}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise SchemaValidationError(
                f"Schedule response for {date} is not valid JSON: {e}") from e

        try:
            schedule = ScheduleResponse.model_validate(data)
        except ValidationError as e:
            raise SchemaValidationError(
                f"Unexpected schedule response for {date}: {e}") from e

        logger.debug(f"Schedule for {date}: {len(schedule.dates)} date(s), "
                     f"{len(schedule.all_games())} game(s)")
        return schedule
