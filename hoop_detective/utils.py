import json
import logging
import os
import random

from hoop_detective.api import BallDontLieClient, PlayerDataError
from hoop_detective.models import Player

logger = logging.getLogger(__name__)


def load_fallback_players():
    """Loads the bundled list of well-known players from the JSON file."""
    # This helps find the file regardless of where you run the script from
    base_path = os.path.dirname(__file__)
    file_path = os.path.join(base_path, 'data', 'players.json')

    with open(file_path, 'r', encoding='utf-8') as f:
        return [Player.from_dict(entry) for entry in json.load(f)]


def load_players(config, offline=False, client=None):
    """Returns the full player list from the API, or the bundled list if that fails."""
    if not offline:
        client = client or BallDontLieClient(config)
        try:
            return client.fetch_all_players()
        except PlayerDataError as exc:
            logger.warning("Could not load full player database: %s", exc)
            logger.warning("Using fallback player data")

    players = load_fallback_players()
    if not players:
        raise PlayerDataError("no player data available from the API or the bundled list")
    return players


def get_random_player(player_list, rng=None):
    """Selects one random athlete to be the 'Mystery Player'."""
    return (rng or random).choice(player_list)


def format_time_remaining(seconds):
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def format_duration(seconds):
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    if minutes > 0:
        return f"{minutes} minutes {secs} seconds"
    return f"{secs} seconds"
