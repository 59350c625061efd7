"""Player records and the attribute/verdict vocabulary shared by the game."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

FREE_AGENT = "Free Agent"
UNKNOWN = "Unknown"


class Attribute(str, Enum):
    """Comparable player attributes, in result-row order."""

    NAME = "name"
    TEAM = "team"
    POSITION = "position"
    HEIGHT = "height"
    COLLEGE = "college"
    DRAFT_YEAR = "draft_year"
    DRAFT_ROUND = "draft_round"
    DRAFT_NUMBER = "draft_number"
    JERSEY_NUMBER = "jersey_number"
    COUNTRY = "country"


class Verdict(Enum):
    EXACT = "exact"
    CLOSE = "close"
    MISS = "miss"


class AttributeResult(NamedTuple):
    verdict: Verdict
    display: str


DEFAULT_DRAFT_YEAR = 2020

TEXT_FIELDS = ("position", "height", "college", "jersey_number", "country")


def _clean_text(value: Any, default: str) -> Any:
    if value is None:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if isinstance(value, str):
        return value.strip() or default
    return value


class Player(BaseModel):
    """A single player as seen by the game. ``None`` draft slots mean undrafted."""

    name: str = Field(..., min_length=1)
    team: str = FREE_AGENT
    position: str = UNKNOWN
    height: str = UNKNOWN
    college: str = UNKNOWN
    draft_year: int = DEFAULT_DRAFT_YEAR
    draft_round: Optional[int] = Field(None, ge=1)
    draft_number: Optional[int] = Field(None, ge=1)
    jersey_number: str = UNKNOWN
    country: str = UNKNOWN

    model_config = ConfigDict(frozen=True)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("team", mode="before")
    @classmethod
    def team_or_free_agent(cls, value: Any) -> Any:
        return _clean_text(value, FREE_AGENT)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def text_or_unknown(cls, value: Any) -> Any:
        return _clean_text(value, UNKNOWN)

    @field_validator("draft_year", mode="before")
    @classmethod
    def draft_year_default(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_DRAFT_YEAR
        return value

    @field_validator("draft_round", "draft_number", mode="before")
    @classmethod
    def undrafted_as_none(cls, value: Any) -> Any:
        # 0 and null both mean the player went undrafted
        if value is None or value == "" or value == 0 or value == "0":
            return None
        return value

    @property
    def is_drafted(self) -> bool:
        return self.draft_round is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Player":
        return cls.model_validate(dict(data))
