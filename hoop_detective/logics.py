from colorama import Fore, Style

from hoop_detective.models import Attribute, AttributeResult, Verdict

MIN_PARTIAL_LENGTH = 3
DRAFT_YEAR_TOLERANCE = 2
DRAFT_NUMBER_TOLERANCE = 5

# (header, width) per column, in Attribute order
COLUMNS = {
    Attribute.NAME: ("NAME", 20),
    Attribute.TEAM: ("TEAM", 20),
    Attribute.POSITION: ("POSITION", 8),
    Attribute.HEIGHT: ("HEIGHT", 6),
    Attribute.COLLEGE: ("COLLEGE", 15),
    Attribute.DRAFT_YEAR: ("DRAFT YR", 9),
    Attribute.DRAFT_ROUND: ("ROUND", 5),
    Attribute.DRAFT_NUMBER: ("PICK", 6),
    Attribute.JERSEY_NUMBER: ("JERSEY", 6),
    Attribute.COUNTRY: ("COUNTRY", 12),
}

MARKERS = {
    Verdict.EXACT: ("🟢", Fore.GREEN),
    Verdict.CLOSE: ("🟡", Fore.YELLOW),
    Verdict.MISS: ("🔴", Fore.RED),
}

# Attributes with no "close" tier
EXACT_ONLY = (
    Attribute.NAME,
    Attribute.TEAM,
    Attribute.POSITION,
    Attribute.HEIGHT,
    Attribute.COLLEGE,
)


def find_player_by_name(guess_name, player_list):
    """
    Exact (case-insensitive) name first, then a substring match either way
    as long as the shorter side has at least 3 characters. First hit wins.
    """
    query = guess_name.strip().lower()
    if not query:
        return None

    for player in player_list:
        if player.name.lower() == query:
            return player

    for player in player_list:
        name = player.name.lower()
        if min(len(query), len(name)) < MIN_PARTIAL_LENGTH:
            continue
        if query in name or name in query:
            return player
    return None


def _exact(guess_value, target_value, display=None):
    verdict = Verdict.EXACT if guess_value == target_value else Verdict.MISS
    return AttributeResult(verdict, display if display is not None else str(guess_value))


def compare_draft_year(guess, target):
    if guess == target:
        return AttributeResult(Verdict.EXACT, str(guess))
    if abs(guess - target) <= DRAFT_YEAR_TOLERANCE:
        return AttributeResult(Verdict.CLOSE, str(guess))
    return AttributeResult(Verdict.MISS, str(guess))


def compare_draft_round(guess, target):
    display = "Undrafted" if guess is None else str(guess)
    return _exact(guess, target, display)


def compare_draft_number(guess, target):
    display = "N/A" if guess is None else str(guess)
    if guess == target:
        return AttributeResult(Verdict.EXACT, display)
    # Undrafted has no pick number, so it can never be "close" to one
    if guess is not None and target is not None and abs(guess - target) <= DRAFT_NUMBER_TOLERANCE:
        return AttributeResult(Verdict.CLOSE, display)
    return AttributeResult(Verdict.MISS, display)


def compare_players(guess, target):
    """
    Compares all 10 attributes and returns {Attribute: AttributeResult}
    in result-row order.
    """
    results = {}
    for attribute in EXACT_ONLY:
        results[attribute] = _exact(getattr(guess, attribute.value), getattr(target, attribute.value))

    results[Attribute.DRAFT_YEAR] = compare_draft_year(guess.draft_year, target.draft_year)
    results[Attribute.DRAFT_ROUND] = compare_draft_round(guess.draft_round, target.draft_round)
    results[Attribute.DRAFT_NUMBER] = compare_draft_number(guess.draft_number, target.draft_number)
    results[Attribute.JERSEY_NUMBER] = _exact(guess.jersey_number, target.jersey_number)
    results[Attribute.COUNTRY] = _exact(guess.country, target.country)
    return results


def colorize(text, verdict):
    marker, color = MARKERS[verdict]
    return f"{marker} {color}{text}{Style.RESET_ALL}"


def get_feedback(results):
    """One pipe-separated, fixed-width row built from compare_players output."""
    cells = []
    for attribute, (_, width) in COLUMNS.items():
        result = results[attribute]
        cells.append(colorize(f"{result.display:<{width}}", result.verdict))
    return " | ".join(cells)


def get_header():
    # Markers take up 3 columns ahead of each value
    cells = [f"{title:<{width + 3}}" for title, width in COLUMNS.values()]
    line = "=" * 150
    return f"{line}\n{' | '.join(cells)}\n{line}"


def get_player_details(player):
    lines = [
        "-" * 50,
        f"Name: {player.name}",
        f"Team: {player.team}",
        f"Position: {player.position}",
        f"Height: {player.height}",
        f"College: {player.college}",
        f"Draft Year: {player.draft_year}",
    ]
    if player.is_drafted:
        lines.append(f"Draft Round: {player.draft_round}")
        lines.append(f"Draft Pick: {player.draft_number if player.draft_number is not None else 'N/A'}")
    else:
        lines.append("Draft Status: Undrafted")
    lines += [
        f"Jersey Number: {player.jersey_number}",
        f"Country: {player.country}",
        "-" * 50,
    ]
    return "\n".join(lines)


def get_instructions(player_count):
    return "\n".join(
        [
            "",
            "How to play:",
            "- Guess NBA players by typing their full name",
            f"- {colorize('Green', Verdict.EXACT)} = Exact match",
            f"- {colorize('Yellow', Verdict.CLOSE)} = Close match (within range for numbers)",
            f"- {colorize('Red', Verdict.MISS)} = No match",
            "",
            f"Database contains {player_count} NBA players from throughout history!",
            "Type 'hint' during the game to get clues about the mystery player.",
            "=" * 80,
        ]
    )
