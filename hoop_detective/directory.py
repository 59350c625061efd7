"""Read-only collection of players with random selection and name lookup."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Sequence

from rapidfuzz import fuzz, process

from hoop_detective.logics import find_player_by_name
from hoop_detective.models import Player
from hoop_detective.utils import get_random_player

SUGGESTION_CUTOFF = 70


class PlayerDirectory:
    def __init__(self, players: Sequence[Player], rng: Optional[random.Random] = None):
        if not players:
            raise ValueError("player directory needs at least one player")
        self._players = tuple(players)
        self._rng = rng

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def names(self) -> List[str]:
        return [p.name for p in self._players]

    def pick_random_target(self) -> Player:
        return get_random_player(self._players, self._rng)

    def find_by_name(self, query: str) -> Optional[Player]:
        return find_player_by_name(query, self._players)

    def suggest_name(self, query: str) -> Optional[str]:
        """Closest-sounding name for a failed lookup. Never used to resolve a guess."""
        query = query.strip()
        if not query:
            return None
        # extractOne returns (name, score, index)
        match = process.extractOne(
            query, self.names(), scorer=fuzz.WRatio, score_cutoff=SUGGESTION_CUTOFF
        )
        if match:
            return match[0]
        return None
