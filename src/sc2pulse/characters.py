# src/sc2pulse/characters.py
import logging
from typing import Any, Dict, List, Sequence

from .pulse_client import join_ids, pulse_get

logger = logging.getLogger(__name__)

SUMMARY_BATCH_SIZE = 50
# Deeper summaries are too expensive for the server to serve in batches.
MAX_SUMMARY_DEPTH = 120


def summary_batch_size(depth_days: int) -> int:
    return 1 if depth_days > MAX_SUMMARY_DEPTH else SUMMARY_BATCH_SIZE


def fetch_character_summaries(ids: Sequence[int], depth_days: int) -> List[Dict[str, Any]]:
    """
    Fetch 1v1 summaries for the given character ids.

    Uses:
      GET /character/{ids}/summary/1v1/{depth}

    Ids are sent in batches of 50, or one at a time when depth_days is
    above MAX_SUMMARY_DEPTH. Results keep the batch order.
    """
    batch_size = summary_batch_size(depth_days)
    result: List[Dict[str, Any]] = []
    for start in range(0, len(ids), batch_size):
        batch = ids[start:start + batch_size]
        logger.debug("Fetching %d summaries (depth=%s)", len(batch), depth_days)
        result.extend(pulse_get(f"character/{join_ids(batch)}/summary/1v1/{depth_days}"))
    return result


def fetch_characters(ids: Sequence[int]) -> List[Dict[str, Any]]:
    """Unbatched; the caller keeps the id count within server limits."""
    return pulse_get(f"character/{join_ids(ids)}")


def fetch_character_by_id(ids: Sequence[int]) -> Dict[int, Dict[str, Any]]:
    return {character["id"]: character for character in fetch_characters(ids)}


def search_characters(term: str) -> List[Dict[str, Any]]:
    """
    Full-text character search.

    Uses:
      GET /character/search?term={term}
    """
    return pulse_get("character/search", params={"term": term})


def fetch_clan_members(tag: str, region: str) -> Dict[int, Dict[str, Any]]:
    """
    Resolve a clan tag to its members in one region.

    Returns search matches keyed by character id, in search order.
    """
    wanted = region.lower()
    members: Dict[int, Dict[str, Any]] = {}
    for match in search_characters(f"[{tag}]"):
        character = match["members"]["character"]
        if character["region"].lower() == wanted:
            members[character["id"]] = match

    if not members:
        logger.warning("No members found for clan [%s] in region %s", tag, region)
    return members
