"""Random attribute hints (no repeats per game) and progressive name hints."""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from hoop_detective.models import FREE_AGENT, UNKNOWN, Attribute, Player

# Everything but the name, which has its own progressive hints
HINTABLE_ATTRIBUTES: Tuple[Attribute, ...] = tuple(a for a in Attribute if a is not Attribute.NAME)

NO_COLLEGE = ("None", UNKNOWN)


def describe_attribute(player: Player, attribute: Attribute) -> str:
    if attribute is Attribute.TEAM:
        if player.team == FREE_AGENT:
            return "The player is currently a free agent"
        return f"The player's current team is: {player.team}"
    if attribute is Attribute.POSITION:
        if player.position == UNKNOWN:
            return "The player's position is not available"
        return f"The player's position is: {player.position}"
    if attribute is Attribute.HEIGHT:
        if player.height == UNKNOWN:
            return "The player's height is not available"
        return f"The player's height is: {player.height}"
    if attribute is Attribute.COLLEGE:
        if player.college in NO_COLLEGE:
            return "The player did not attend college (international or straight from high school)"
        return f"The player attended: {player.college}"
    if attribute is Attribute.DRAFT_YEAR:
        return f"The player was drafted in: {player.draft_year}"
    if attribute is Attribute.DRAFT_ROUND:
        if player.draft_round is None:
            return "The player was undrafted"
        return f"The player was drafted in round: {player.draft_round}"
    if attribute is Attribute.DRAFT_NUMBER:
        if player.draft_number is None:
            return "The player was undrafted (no draft pick number)"
        return f"The player was the #{player.draft_number} overall pick"
    if attribute is Attribute.JERSEY_NUMBER:
        if player.jersey_number == UNKNOWN:
            return "The player's jersey number is not available"
        return f"The player's jersey number is: #{player.jersey_number}"
    if attribute is Attribute.COUNTRY:
        if player.country == UNKNOWN:
            return "The player's country is not available"
        return f"The player is from: {player.country}"
    raise ValueError(f"{attribute} is not a hintable attribute")


class HintAllocator:
    """Hands out each hintable attribute of one target at most once."""

    def __init__(self, target: Player, rng: Optional[random.Random] = None):
        self.target = target
        self.revealed: Set[Attribute] = set()
        self._rng = rng or random

    def remaining(self) -> List[Attribute]:
        return [a for a in HINTABLE_ATTRIBUTES if a not in self.revealed]

    def reveal_random_attribute(self) -> Optional[Tuple[Attribute, str]]:
        """Pick an unrevealed attribute and describe it; None once all are used."""
        available = self.remaining()
        if not available:
            return None
        attribute = self._rng.choice(available)
        self.revealed.add(attribute)
        return attribute, describe_attribute(self.target, attribute)


def _name_prefix(part: str) -> str:
    if len(part) <= 3:
        shown = 1
    elif len(part) <= 5:
        shown = 2
    else:
        shown = 3
    return part[:shown] + "_" * (len(part) - shown)


def name_hint(full_name: str, level: int) -> str:
    """
    Level 1: first letter of each name part ("L_ J_").
    Level 2: a longer prefix padded to the part's length plus a letter count
    ("LeB___ (6 letters) Ja___ (5 letters)").
    """
    parts = full_name.split()
    if not parts:
        return UNKNOWN

    if level == 2:
        return " ".join(f"{_name_prefix(part)} ({len(part)} letters)" for part in parts)
    return " ".join(f"{part[0]}_" for part in parts)
