# src/sc2pulse/rows.py
import logging
import re
from operator import itemgetter
from typing import Any, Callable, Dict, List, Optional

from .enums import LEAGUES, RACES, EnumVariant, lookup_by_code
from .pulse_client import profile_link

logger = logging.getLogger(__name__)

SUMMARY_HEADER = ["Name", "Race", "Games", "Last MMR", "Avg MMR", "Max MMR", "Pulse link"]
LADDER_HEADER = ["Name", "Race", "MMR", "Wins", "Losses", "Region", "League", "Tier", "Pulse link"]

# Sortable CharacterSummary fields, keyed by their camelCase API name.
SUMMARY_SORT_FIELDS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "games": itemgetter("games"),
    "ratingLast": itemgetter("ratingLast"),
    "ratingAvg": itemgetter("ratingAvg"),
    "ratingMax": itemgetter("ratingMax"),
}


def trim_character_name(name: str) -> str:
    """
    Drop the BattleTag discriminator: 'Serral#1234' -> 'Serral'.

    Names without '#' are returned unchanged.
    """
    index = name.find("#")
    return name if index < 0 else name[:index]


def display_name(character: Dict[str, Any], reveal: bool = False,
                 member: Optional[Dict[str, Any]] = None) -> str:
    if reveal and member and member.get("proNickname"):
        return member["proNickname"]
    return trim_character_name(character["name"])


def favorite_race(member: Dict[str, Any]) -> EnumVariant:
    """Race with the most games played; ties go to the earliest in RACES."""
    best = RACES[0]
    best_games = -1
    for race in RACES:
        games = member.get(f"{race.name}GamesPlayed") or 0
        if games > best_games:
            best, best_games = race, games
    return best


def _snake_to_camel(value: str) -> str:
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), value)


def summary_sort_key(sort_by: str) -> Optional[Callable[[Dict[str, Any]], Any]]:
    """
    Accessor for a sort field given as snake_case, camelCase or words.

    'rating_last', 'Rating Last' and 'ratingLast' all select ratingLast.
    Returns None for unknown fields.
    """
    normalized = re.sub(r"\s+", "_", sort_by.strip())
    if "_" in normalized:
        normalized = _snake_to_camel(normalized.lower())
    for field, accessor in SUMMARY_SORT_FIELDS.items():
        if field.lower() == normalized.lower():
            return accessor
    return None


def sort_summaries(summaries: List[Dict[str, Any]], sort_by: str) -> List[Dict[str, Any]]:
    """Sort descending by sort_by. Unknown fields leave the order untouched."""
    key = summary_sort_key(sort_by)
    if key is None:
        logger.warning("Unknown summary sort field %r, keeping fetch order", sort_by)
        return list(summaries)
    return sorted(summaries, key=key, reverse=True)


def project_summary_row(summary: Dict[str, Any], character: Dict[str, Any]) -> List[Any]:
    return [
        display_name(character),
        summary["race"].lower(),
        summary["games"],
        summary["ratingLast"],
        summary["ratingAvg"],
        summary["ratingMax"],
        profile_link(character["id"]),
    ]


def project_ladder_row(team: Dict[str, Any], reveal: bool = False) -> List[Any]:
    """
    One ladder row per team.

    Only the first member is shown, so 2v2 and larger teams are represented
    by a single player.
    """
    member = team["members"][0]
    character = member["character"]
    tier = team.get("tierType")
    return [
        display_name(character, reveal, member),
        favorite_race(member).name,
        team["rating"],
        team["wins"],
        team["losses"],
        team["region"],
        lookup_by_code(team["league"]["type"], LEAGUES).name,
        "" if tier is None else tier + 1,
        profile_link(character["id"]),
    ]
