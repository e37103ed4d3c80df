# src/sc2pulse/enums.py
"""
Fixed SC2 Pulse catalogs.

Every variant carries the numeric code the API sends, the lowercase name used
in query parameters, the upper-case enum string the API uses in JSON bodies,
and a display order.
"""
from dataclasses import dataclass
from typing import Iterable, Optional


class NotFoundError(LookupError):
    """Raised when a code or name matches no variant of a catalog."""


@dataclass(frozen=True)
class EnumVariant:
    code: int
    name: str
    full_name: str
    order: int
    short_name: str = ""


REGION_US = EnumVariant(1, "us", "US", 1)
REGION_EU = EnumVariant(2, "eu", "EU", 2)
REGION_KR = EnumVariant(3, "kr", "KR", 3)
REGION_CN = EnumVariant(5, "cn", "CN", 4)
REGIONS = (REGION_US, REGION_EU, REGION_KR, REGION_CN)

# Declaration order doubles as the tie-break order for favorite race.
RACE_TERRAN = EnumVariant(1, "terran", "TERRAN", 1)
RACE_PROTOSS = EnumVariant(2, "protoss", "PROTOSS", 2)
RACE_ZERG = EnumVariant(3, "zerg", "ZERG", 3)
RACE_RANDOM = EnumVariant(4, "random", "RANDOM", 4)
RACES = (RACE_TERRAN, RACE_PROTOSS, RACE_ZERG, RACE_RANDOM)

LEAGUE_BRONZE = EnumVariant(0, "bronze", "BRONZE", 1, "bro")
LEAGUE_SILVER = EnumVariant(1, "silver", "SILVER", 2, "sil")
LEAGUE_GOLD = EnumVariant(2, "gold", "GOLD", 3, "gol")
LEAGUE_PLATINUM = EnumVariant(3, "platinum", "PLATINUM", 4, "pla")
LEAGUE_DIAMOND = EnumVariant(4, "diamond", "DIAMOND", 5, "dia")
LEAGUE_MASTER = EnumVariant(5, "master", "MASTER", 6, "mas")
LEAGUE_GRANDMASTER = EnumVariant(6, "grandmaster", "GRANDMASTER", 7, "gra")
LEAGUES = (
    LEAGUE_BRONZE,
    LEAGUE_SILVER,
    LEAGUE_GOLD,
    LEAGUE_PLATINUM,
    LEAGUE_DIAMOND,
    LEAGUE_MASTER,
    LEAGUE_GRANDMASTER,
)

LEAGUE_TIER_FIRST = EnumVariant(0, "1", "FIRST", 1)
LEAGUE_TIER_SECOND = EnumVariant(1, "2", "SECOND", 2)
LEAGUE_TIER_THIRD = EnumVariant(2, "3", "THIRD", 3)
LEAGUE_TIERS = (LEAGUE_TIER_FIRST, LEAGUE_TIER_SECOND, LEAGUE_TIER_THIRD)

TEAM_FORMAT_1V1 = EnumVariant(201, "1v1", "LOTV_1V1", 1)
TEAM_FORMAT_2V2 = EnumVariant(202, "2v2", "LOTV_2V2", 3)
TEAM_FORMAT_3V3 = EnumVariant(203, "3v3", "LOTV_3V3", 4)
TEAM_FORMAT_4V4 = EnumVariant(204, "4v4", "LOTV_4V4", 5)
TEAM_FORMAT_ARCHON = EnumVariant(206, "archon", "LOTV_ARCHON", 2)
TEAM_FORMATS = (
    TEAM_FORMAT_1V1,
    TEAM_FORMAT_2V2,
    TEAM_FORMAT_3V3,
    TEAM_FORMAT_4V4,
    TEAM_FORMAT_ARCHON,
)

TEAM_TYPE_ARRANGED = EnumVariant(0, "arranged", "ARRANGED", 1)
TEAM_TYPE_RANDOM = EnumVariant(1, "random", "RANDOM", 2)
TEAM_TYPES = (TEAM_TYPE_ARRANGED, TEAM_TYPE_RANDOM)


def _find(table: Iterable[EnumVariant], match, what: str, strict: bool) -> Optional[EnumVariant]:
    for variant in table:
        if match(variant):
            return variant
    if strict:
        raise NotFoundError(f"No variant found for {what}")
    return None


def lookup_by_code(code: int, table: Iterable[EnumVariant], strict: bool = True) -> Optional[EnumVariant]:
    return _find(table, lambda v: v.code == code, f"code {code!r}", strict)


def lookup_by_name(name: str, table: Iterable[EnumVariant], strict: bool = True) -> Optional[EnumVariant]:
    wanted = name.lower()
    return _find(table, lambda v: v.name.lower() == wanted, f"name {name!r}", strict)


def lookup_by_full_name(full_name: str, table: Iterable[EnumVariant], strict: bool = True) -> Optional[EnumVariant]:
    wanted = full_name.lower()
    return _find(table, lambda v: v.full_name.lower() == wanted, f"full name {full_name!r}", strict)
