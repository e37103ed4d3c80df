# src/sc2pulse/ladder.py
"""
Cursor-based ladder traversal.

The ladder endpoint returns teams in descending rating order, starting just
after an anchor (rating, id). Each page is anchored at the last team of the
previous page until enough teams are collected or a page comes back empty.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from .enums import TEAM_FORMAT_1V1, TEAM_TYPE_ARRANGED, EnumVariant
from .pulse_client import pulse_get

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LadderCursor:
    """Rating and id of the last seen team; the next page starts after it."""
    rating: int
    id: int

    @classmethod
    def start(cls, rating_start: int) -> "LadderCursor":
        # Anchor one point above so the first page includes rating_start.
        return cls(rating_start + 1, 1)

    @classmethod
    def after(cls, team: Dict[str, Any]) -> "LadderCursor":
        return cls(team["rating"], team["id"])


def ladder_params(
    season: int,
    regions: Sequence[EnumVariant],
    leagues: Sequence[EnumVariant],
) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "season": season,
        "queue": TEAM_FORMAT_1V1.full_name,
        "team-type": TEAM_TYPE_ARRANGED.full_name,
        "page": 1,
    }
    for region in regions:
        params[region.name] = "true"
    for league in leagues:
        params[league.short_name] = "true"
    return params


def fetch_ladder_page(
    cursor: LadderCursor,
    season: int,
    regions: Sequence[EnumVariant],
    leagues: Sequence[EnumVariant],
) -> List[Dict[str, Any]]:
    """
    Fetch one ladder page of 1v1 arranged teams after the cursor.

    Uses:
      GET /ladder/a/{rating}/{id}/1
    """
    data = pulse_get(
        f"ladder/a/{cursor.rating}/{cursor.id}/1",
        params=ladder_params(season, regions, leagues),
    )
    return data.get("result") or []


def fetch_ladder_teams(
    count: int,
    season: int,
    regions: Sequence[EnumVariant],
    leagues: Sequence[EnumVariant],
    rating_start: int,
) -> List[Dict[str, Any]]:
    """
    Walk the ladder from rating_start down until count teams are collected.

    Returns at most count teams in ladder order. Fewer are returned when the
    ladder runs out. count <= 0 returns [] without any request.
    """
    teams: List[Dict[str, Any]] = []
    cursor = LadderCursor.start(rating_start)
    page_number = 0
    while len(teams) < count:
        page = fetch_ladder_page(cursor, season, regions, leagues)
        page_number += 1
        if not page:
            logger.debug("Ladder exhausted after %d pages", page_number)
            break
        teams.extend(page)
        cursor = LadderCursor.after(page[-1])
        logger.debug("Page %d: %d teams, %d total, next cursor %s",
                     page_number, len(page), len(teams), cursor)
    return teams[:max(count, 0)]


def fetch_seasons() -> List[Dict[str, Any]]:
    """All seasons, most recent first."""
    return pulse_get("season/list/all")


def current_season() -> int:
    seasons = fetch_seasons()
    if not seasons:
        raise RuntimeError("SC2 Pulse API returned an empty season list")
    return seasons[0]["battlenetId"]
