"""Pytest conftest — fake SC2 Pulse transport wired into every fetching module."""

import pytest

from helpers import FakePulse

from sc2pulse import characters, ladder


@pytest.fixture
def pulse(monkeypatch):
    """A FakePulse replacing the HTTP helper. Add routes per test."""
    fake = FakePulse()
    monkeypatch.setattr(characters, "pulse_get", fake)
    monkeypatch.setattr(ladder, "pulse_get", fake)
    return fake
