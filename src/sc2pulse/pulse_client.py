# src/sc2pulse/pulse_client.py
import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

logger = logging.getLogger(__name__)

URL_ROOT = os.getenv("SC2PULSE_URL_ROOT", "https://sc2pulse.nephest.com/sc2").rstrip("/")
API_ROOT = URL_ROOT + "/api"
REQUEST_TIMEOUT = float(os.getenv("SC2PULSE_TIMEOUT", "10"))


def pulse_get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    Low-level helper for GET requests to the SC2 Pulse API.

    Args:
        path: API path relative to the API root, e.g. 'character/1,2'.
        params: Optional query parameters.

    Returns:
        Parsed JSON response (a list or a dict, depending on the endpoint).

    Raises:
        RuntimeError if the response status code is not 200.
    """
    url = f"{API_ROOT}/{path.lstrip('/')}"
    logger.debug("GET %s params=%s", url, params)
    response = requests.get(url, params=params, timeout=REQUEST_TIMEOUT)

    if response.status_code != 200:
        raise RuntimeError(
            f"SC2 Pulse API error {response.status_code}: {response.text}"
        )

    return response.json()


def join_ids(ids) -> str:
    """Comma-join ids into a single url-encoded path segment."""
    return quote(",".join(str(i) for i in ids), safe="")


def profile_link(character_id: int) -> str:
    """Character page on the SC2 Pulse site, opened on the MMR history tab."""
    return (
        f"{URL_ROOT}/?type=character&id={quote(str(character_id), safe='')}"
        "&m=1#player-stats-mmr"
    )
