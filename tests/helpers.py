"""Shared test factories and a fake SC2 Pulse transport.

Factories build raw API dicts with sensible defaults and easy overrides.
"""

import re


# ─── API Record Factories ────────────────────────────────────────

def make_character(id=100, name="Serral#1234", region="EU", **overrides):
    character = {"id": id, "name": name, "region": region, "realm": 1, "battlenetId": id * 10}
    character.update(overrides)
    return character


def make_summary(player_character_id=100, **overrides):
    summary = {
        "playerCharacterId": player_character_id,
        "race": "ZERG",
        "games": 10,
        "ratingLast": 6000,
        "ratingAvg": 5900,
        "ratingMax": 6100,
    }
    summary.update(overrides)
    return summary


def make_member(character=None, **overrides):
    member = {
        "character": character or make_character(),
        "zergGamesPlayed": 20,
    }
    member.update(overrides)
    return member


def make_team(id=1, rating=5000, members=None, **overrides):
    team = {
        "id": id,
        "rating": rating,
        "wins": 30,
        "losses": 10,
        "region": "EU",
        "league": {"type": 6},
        "tierType": 0,
        "members": members or [make_member(make_character(id=id * 100, name=f"Player{id}#{id}"))],
    }
    team.update(overrides)
    return team


def make_search_match(id=100, name="Serral#1234", region="EU"):
    return {"members": {"character": make_character(id=id, name=name, region=region)}}


# ─── Fake Transport ──────────────────────────────────────────────

class FakePulse:
    """Stands in for pulse_get. Routes by path regex, records every call."""

    def __init__(self):
        self.calls = []
        self.routes = []

    def route(self, pattern, handler):
        """handler(match, params) -> JSON value. Non-callables are returned as is."""
        self.routes.append((re.compile(pattern), handler))
        return self

    def __call__(self, path, params=None):
        self.calls.append((path, params))
        for pattern, handler in self.routes:
            m = pattern.fullmatch(path)
            if m:
                return handler(m, params) if callable(handler) else handler
        raise AssertionError(f"unexpected request: {path} {params}")

    def paths(self, prefix=""):
        return [p for p, _ in self.calls if p.startswith(prefix)]


class LadderSource:
    """A descending ladder served in pages after a (rating, id) cursor."""

    PATTERN = r"ladder/a/(-?\d+)/(\d+)/1"

    def __init__(self, teams, page_size):
        self.teams = sorted(teams, key=lambda t: (-t["rating"], t["id"]))
        self.page_size = page_size

    def __call__(self, match, params):
        rating, team_id = int(match.group(1)), int(match.group(2))
        after = [
            t for t in self.teams
            if t["rating"] < rating or (t["rating"] == rating and t["id"] > team_id)
        ]
        return {"result": after[:self.page_size]}


def make_ladder(n, top_rating=5000):
    """n teams with strictly descending ratings starting at top_rating."""
    return [make_team(id=i + 1, rating=top_rating - i * 10) for i in range(n)]
