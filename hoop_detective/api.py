"""Ball Don't Lie client that turns the paginated /players feed into Player records."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

import requests
from pydantic import ValidationError

from hoop_detective.config import Config
from hoop_detective.models import DEFAULT_DRAFT_YEAR, FREE_AGENT, UNKNOWN, Player

logger = logging.getLogger(__name__)

POSITION_ALIASES = {
    "POINT GUARD": "PG",
    "SHOOTING GUARD": "SG",
    "SMALL FORWARD": "SF",
    "POWER FORWARD": "PF",
    "CENTER": "C",
    "GUARD": "G",
    "FORWARD": "F",
}


class PlayerDataError(RuntimeError):
    """Raised when the remote player feed cannot produce usable records."""


def _optional_text(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{field} should be a string, got {type(value).__name__}")
    return value


def get_team_name(team: Optional[Mapping[str, Any]]) -> str:
    team = team or {}
    if not isinstance(team, Mapping):
        raise TypeError(f"team should be an object, got {type(team).__name__}")
    return team.get("full_name") or team.get("name") or FREE_AGENT


def normalize_position(position: Optional[str]) -> str:
    pos = _optional_text(position, "position").strip().upper()
    if not pos:
        return UNKNOWN
    return POSITION_ALIASES.get(pos, pos)


def format_height(height: Optional[str]) -> str:
    """'6-2' -> 6'2\" ; anything unexpected is passed through."""
    height = _optional_text(height, "height")
    if not height:
        return UNKNOWN
    parts = height.split("-")
    if len(parts) == 2:
        return f"{parts[0]}'{parts[1]}\""
    return height


def player_from_api(raw: Any) -> Optional[Player]:
    """
    Normalize one API entry. Entries that are not objects or lack a first or
    last name are skipped (None); wrongly typed fields raise TypeError or
    pydantic's ValidationError.
    """
    if not isinstance(raw, Mapping):
        return None
    first = _optional_text(raw.get("first_name"), "first_name").strip()
    last = _optional_text(raw.get("last_name"), "last_name").strip()
    if not first or not last:
        return None

    return Player.from_dict(
        {
            "name": f"{first} {last}",
            "team": get_team_name(raw.get("team")),
            "position": normalize_position(raw.get("position")),
            "height": format_height(raw.get("height")),
            "college": raw.get("college"),
            "draft_year": raw.get("draft_year") or DEFAULT_DRAFT_YEAR,
            "draft_round": raw.get("draft_round"),
            "draft_number": raw.get("draft_number"),
            "jersey_number": raw.get("jersey_number"),
            "country": raw.get("country"),
        }
    )


class BallDontLieClient:
    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.session = session or requests.Session()
        self.sleep = sleep

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
            "Accept-Language": "en-US,en;q=0.9",
            "Connection": "keep-alive",
        }
        if self.config.api_key:
            headers["Authorization"] = self.config.api_key
        return headers

    def get_page(self, cursor: Optional[int] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"per_page": self.config.per_page}
        if cursor:
            params["cursor"] = cursor
        url = f"{self.config.api_base_url}/players"

        try:
            resp = self.session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as exc:
            raise PlayerDataError(f"request to {url} failed: {exc}") from exc

        if resp.status_code != 200:
            raise PlayerDataError(f"API request failed with status: {resp.status_code}")

        body = resp.text
        if "<!DOCTYPE html>" in body or "<html>" in body:
            # The API serves its docs page instead of JSON when auth is missing/invalid
            raise PlayerDataError(
                "API returned an HTML page; authentication required or invalid API key"
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise PlayerDataError(f"failed to parse API response: {exc}") from exc

        if not isinstance(payload, dict):
            raise PlayerDataError(
                f"unexpected API response: expected an object, got {type(payload).__name__}"
            )
        if not isinstance(payload.get("data") or [], list):
            raise PlayerDataError("unexpected API response: 'data' is not a list")
        meta = payload.get("meta")
        if meta is not None and not isinstance(meta, dict):
            raise PlayerDataError("unexpected API response: 'meta' is not an object")
        return payload

    def fetch_all_players(self) -> List[Player]:
        if not self.config.api_key:
            raise PlayerDataError(
                "no API key provided; get one at https://app.balldontlie.io and set "
                "BALLDONTLIE_API_KEY in your environment or .env file"
            )
        logger.debug("Using API key for authentication (key: %s...)", self.config.api_key[:8])
        logger.info("Fetching NBA players from %s", self.config.api_base_url)

        players: List[Player] = []
        cursor: Optional[int] = None

        for page in range(self.config.max_pages):
            try:
                payload = self.get_page(cursor)
            except PlayerDataError:
                # Keep what earlier pages gave us
                if players:
                    logger.warning("Stopping after page %d; keeping %d players", page, len(players), exc_info=True)
                    break
                raise

            data = payload.get("data") or []
            processed = 0
            for raw in data:
                try:
                    player = player_from_api(raw)
                except (TypeError, ValidationError):
                    logger.debug("Skipping malformed player entry: %r", raw)
                    continue
                if player is not None:
                    players.append(player)
                    processed += 1
            logger.info(
                "Loaded %d players so far (processed %d from cursor %s)",
                len(players),
                processed,
                cursor or 0,
            )

            next_cursor = (payload.get("meta") or {}).get("next_cursor")
            if next_cursor is None or len(data) < self.config.per_page:
                logger.debug("Reached end of data at cursor %s", cursor or 0)
                break

            cursor = next_cursor
            # Only wait when another request may follow
            if page + 1 < self.config.max_pages:
                self.sleep(self.config.page_delay)

        if not players:
            raise PlayerDataError("no players retrieved from API")

        logger.info("Successfully loaded %d NBA players from API", len(players))
        return players
