import random

import pytest

from hoop_detective.hints import HINTABLE_ATTRIBUTES, HintAllocator, describe_attribute, name_hint
from hoop_detective.models import Attribute

from tests.helpers import LEBRON, VANVLEET, make_player


def test_hintable_attributes_exclude_name():
    assert Attribute.NAME not in HINTABLE_ATTRIBUTES
    assert len(HINTABLE_ATTRIBUTES) == 9


def test_reveals_every_attribute_once_then_exhausts():
    allocator = HintAllocator(LEBRON, rng=random.Random(3))

    revealed = [allocator.reveal_random_attribute() for _ in HINTABLE_ATTRIBUTES]
    names = [attribute for attribute, _ in revealed]

    assert len(set(names)) == len(HINTABLE_ATTRIBUTES)
    assert set(names) == set(HINTABLE_ATTRIBUTES)
    assert allocator.remaining() == []
    assert allocator.reveal_random_attribute() is None
    assert allocator.revealed == set(HINTABLE_ATTRIBUTES)


def test_reveal_returns_rendered_text():
    allocator = HintAllocator(LEBRON, rng=random.Random(0))

    attribute, text = allocator.reveal_random_attribute()
    assert text == describe_attribute(LEBRON, attribute)
    assert attribute not in allocator.remaining()


def test_undrafted_phrasing():
    assert describe_attribute(VANVLEET, Attribute.DRAFT_ROUND) == "The player was undrafted"
    assert "undrafted" in describe_attribute(VANVLEET, Attribute.DRAFT_NUMBER)


def test_drafted_phrasing():
    assert describe_attribute(LEBRON, Attribute.DRAFT_NUMBER) == "The player was the #1 overall pick"
    assert describe_attribute(LEBRON, Attribute.DRAFT_ROUND) == "The player was drafted in round: 1"


def test_sentinel_phrasing():
    player = make_player("Mystery Man", team="Free Agent", jersey_number="Unknown", college="Unknown")

    assert "not available" in describe_attribute(player, Attribute.JERSEY_NUMBER)
    assert "Unknown" not in describe_attribute(player, Attribute.JERSEY_NUMBER)
    assert "free agent" in describe_attribute(player, Attribute.TEAM)
    assert "did not attend college" in describe_attribute(player, Attribute.COLLEGE)


def test_name_attribute_is_not_describable():
    with pytest.raises(ValueError):
        describe_attribute(LEBRON, Attribute.NAME)


def test_name_hint_level_one():
    assert name_hint("LeBron James", 1) == "L_ J_"


def test_name_hint_level_two():
    hint = name_hint("LeBron James", 2)

    assert hint == "LeB___ (6 letters) Ja___ (5 letters)"
    assert "(6 letters)" in hint
    assert "(5 letters)" in hint


def test_name_hint_level_two_short_parts():
    assert name_hint("Al Horford", 2) == "A_ (2 letters) Hor____ (7 letters)"


def test_name_hint_other_levels_fall_back_to_initials():
    assert name_hint("Shaquille O'Neal", 5) == "S_ O_"


def test_name_hint_empty_name():
    assert name_hint("   ", 1) == "Unknown"
