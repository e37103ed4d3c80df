"""Tests for the HTTP helper and link building."""

import pytest

from sc2pulse import pulse_client
from sc2pulse.pulse_client import API_ROOT, URL_ROOT, join_ids, profile_link, pulse_get


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    calls = []
    state = {"response": FakeResponse(payload=[])}

    def get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return state["response"]

    monkeypatch.setattr(pulse_client.requests, "get", get)
    return calls, state


class TestPulseGet:
    def test_builds_url_under_api_root(self, fake_get):
        calls, _ = fake_get
        pulse_get("character/1,2")
        assert calls[0]["url"] == f"{API_ROOT}/character/1,2"

    def test_passes_params_and_timeout(self, fake_get):
        calls, _ = fake_get
        pulse_get("/season/list/all", params={"a": 1})
        assert calls[0]["url"] == f"{API_ROOT}/season/list/all"
        assert calls[0]["params"] == {"a": 1}
        assert calls[0]["timeout"] == pulse_client.REQUEST_TIMEOUT

    def test_returns_decoded_json(self, fake_get):
        _, state = fake_get
        state["response"] = FakeResponse(payload={"result": [1, 2]})
        assert pulse_get("ladder/a/1/1/1") == {"result": [1, 2]}

    def test_non_200_raises(self, fake_get):
        _, state = fake_get
        state["response"] = FakeResponse(status_code=503, text="down")
        with pytest.raises(RuntimeError, match="503: down"):
            pulse_get("character/1")

    def test_decode_error_propagates(self, fake_get):
        _, state = fake_get
        state["response"] = FakeResponse(payload=ValueError("not json"))
        with pytest.raises(ValueError):
            pulse_get("character/1")


class TestLinks:
    def test_join_ids_encodes_commas(self):
        assert join_ids([1, 22, 333]) == "1%2C22%2C333"

    def test_profile_link(self):
        assert profile_link(42) == f"{URL_ROOT}/?type=character&id=42&m=1#player-stats-mmr"

    def test_profile_link_is_deterministic(self):
        assert profile_link(7) == profile_link(7)
