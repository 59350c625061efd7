import pytest
from pydantic import ValidationError

from hoop_detective.models import FREE_AGENT, UNKNOWN, Player


def test_player_is_frozen():
    player = Player(name="LeBron James", team="Los Angeles Lakers")

    with pytest.raises((TypeError, ValidationError)):
        player.team = "Cleveland Cavaliers"  # type: ignore[misc]


def test_from_dict_applies_sentinels():
    player = Player.from_dict({"name": "  Ben Wallace ", "team": "", "college": None, "draft_year": 1996})

    assert player.name == "Ben Wallace"
    assert player.team == FREE_AGENT
    assert player.college == UNKNOWN
    assert player.jersey_number == UNKNOWN
    assert player.draft_year == 1996


def test_from_dict_treats_zero_draft_slots_as_undrafted():
    player = Player.from_dict({"name": "Fred VanVleet", "draft_round": 0, "draft_number": 0})

    assert player.draft_round is None
    assert player.draft_number is None
    assert not player.is_drafted


def test_from_dict_keeps_real_draft_slots():
    player = Player.from_dict({"name": "Nikola Jokic", "draft_round": "2", "draft_number": 41})

    assert player.draft_round == 2
    assert player.draft_number == 41
    assert player.is_drafted


def test_from_dict_requires_name():
    with pytest.raises(ValidationError):
        Player.from_dict({"team": "Boston Celtics"})
    with pytest.raises(ValidationError):
        Player.from_dict({"name": "   "})


def test_players_hash_by_value():
    assert {Player(name="Ben Wallace"), Player(name="Ben Wallace")} == {Player(name="Ben Wallace")}


def test_from_dict_coerces_numeric_text_fields():
    player = Player.from_dict({"name": "Stephen Curry", "jersey_number": 30})

    assert player.jersey_number == "30"


def test_from_dict_rejects_bad_draft_values():
    with pytest.raises(ValidationError):
        Player.from_dict({"name": "Nikola Jokic", "draft_number": -41})
    with pytest.raises(ValidationError):
        Player.from_dict({"name": "Luka Doncic", "draft_year": "soon"})
