# src/sc2pulse/reports.py
"""
Report entry points.

Each report returns a list of rows, header first, ready to be dropped into a
spreadsheet grid.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .characters import fetch_character_by_id, fetch_character_summaries, fetch_clan_members
from .enums import (
    LEAGUES,
    REGIONS,
    EnumVariant,
    lookup_by_full_name,
    lookup_by_name,
)
from .ladder import current_season, fetch_ladder_teams
from .rows import (
    LADDER_HEADER,
    SUMMARY_HEADER,
    project_ladder_row,
    project_summary_row,
    sort_summaries,
)

logger = logging.getLogger(__name__)

DEFAULT_RATING_START = 10000
DEFAULT_SORT = "rating_last"

VariantArg = Union[EnumVariant, str]


def _as_list(value) -> Optional[list]:
    if value is None:
        return None
    if isinstance(value, (str, EnumVariant)):
        return [value]
    return list(value)


def _resolve(value: VariantArg, table: Sequence[EnumVariant]) -> EnumVariant:
    if isinstance(value, EnumVariant):
        return value
    return lookup_by_name(value, table, strict=False) or lookup_by_full_name(value, table)


@dataclass(frozen=True)
class LadderQuery:
    """Fully resolved ladder report parameters. season None means current."""
    count: int
    regions: Tuple[EnumVariant, ...] = REGIONS
    leagues: Tuple[EnumVariant, ...] = LEAGUES
    rating_start: int = DEFAULT_RATING_START
    reveal: bool = False
    season: Optional[int] = None

    @classmethod
    def build(
        cls,
        count: int,
        regions: Union[VariantArg, Iterable[VariantArg], None] = None,
        leagues: Union[VariantArg, Iterable[VariantArg], None] = None,
        rating_start: Optional[int] = None,
        reveal: bool = False,
        season: Optional[int] = None,
    ) -> "LadderQuery":
        """Accepts single values or sequences of variants or their names."""
        region_list = _as_list(regions)
        league_list = _as_list(leagues)
        return cls(
            count=count,
            regions=REGIONS if not region_list
            else tuple(_resolve(r, REGIONS) for r in region_list),
            leagues=LEAGUES if not league_list
            else tuple(_resolve(lg, LEAGUES) for lg in league_list),
            rating_start=DEFAULT_RATING_START if rating_start is None else rating_start,
            reveal=reveal,
            season=season,
        )


def summary_1v1(
    character_ids: Union[int, Sequence[int]],
    depth_days: int,
    sort_by: str = DEFAULT_SORT,
) -> List[List[Any]]:
    """1v1 summary report for a list of character ids."""
    ids = [character_ids] if isinstance(character_ids, int) else list(character_ids)
    summaries = sort_summaries(fetch_character_summaries(ids, depth_days), sort_by)
    characters = fetch_character_by_id([s["playerCharacterId"] for s in summaries]) if summaries else {}

    rows: List[List[Any]] = [list(SUMMARY_HEADER)]
    for summary in summaries:
        rows.append(project_summary_row(summary, characters[summary["playerCharacterId"]]))
    logger.info("summary_1v1: %d ids, %d rows", len(ids), len(rows) - 1)
    return rows


def summary_1v1_clan(
    tag: str,
    region: str,
    depth_days: int,
    sort_by: str = DEFAULT_SORT,
) -> List[List[Any]]:
    """1v1 summary report for every member of a clan in one region."""
    members = fetch_clan_members(tag, region)
    summaries = sort_summaries(fetch_character_summaries(list(members), depth_days), sort_by)

    rows: List[List[Any]] = [list(SUMMARY_HEADER)]
    for summary in summaries:
        character = members[summary["playerCharacterId"]]["members"]["character"]
        rows.append(project_summary_row(summary, character))
    logger.info("summary_1v1_clan [%s] %s: %d rows", tag, region, len(rows) - 1)
    return rows


def run_ladder(query: LadderQuery) -> List[List[Any]]:
    rows: List[List[Any]] = [list(LADDER_HEADER)]
    if query.count <= 0:
        return rows

    season = current_season() if query.season is None else query.season
    teams = fetch_ladder_teams(
        query.count, season, query.regions, query.leagues, query.rating_start
    )
    rows.extend(project_ladder_row(team, query.reveal) for team in teams)
    logger.info("ladder season %s: %d rows", season, len(rows) - 1)
    return rows


def ladder(
    count: int,
    regions: Union[VariantArg, Iterable[VariantArg], None] = None,
    leagues: Union[VariantArg, Iterable[VariantArg], None] = None,
    rating_start: Optional[int] = None,
    reveal: bool = False,
    season: Optional[int] = None,
) -> List[List[Any]]:
    """
    Top of the 1v1 ladder.

    Defaults: all regions, all leagues, rating_start 10000, pro nicknames
    hidden, the current season.
    """
    return run_ladder(LadderQuery.build(count, regions, leagues, rating_start, reveal, season))
