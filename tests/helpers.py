from hoop_detective.models import Player


def make_player(name="LeBron James", **kwargs):
    fields = {
        "team": "Los Angeles Lakers",
        "position": "SF",
        "height": "6'9\"",
        "college": "None",
        "draft_year": 2003,
        "draft_round": 1,
        "draft_number": 1,
        "jersey_number": "6",
        "country": "USA",
    }
    fields.update(kwargs)
    return Player(name=name, **fields)


LEBRON = make_player()
JORDAN = make_player(
    "Michael Jordan",
    team="Retired",
    position="SG",
    height="6'6\"",
    college="North Carolina",
    draft_year=1984,
    draft_number=3,
    jersey_number="23",
)
CURRY = make_player(
    "Stephen Curry",
    team="Golden State Warriors",
    position="PG",
    height="6'2\"",
    college="Davidson",
    draft_year=2009,
    draft_number=7,
    jersey_number="30",
)
VANVLEET = make_player(
    "Fred VanVleet",
    team="Houston Rockets",
    position="PG",
    height="6'0\"",
    college="Wichita State",
    draft_year=2016,
    draft_round=None,
    draft_number=None,
    jersey_number="5",
)
