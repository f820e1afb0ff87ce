"""Shared test fixtures for all test modules."""

import os

import pytest

# ── Environment overrides (must be set before importing gamegroups modules) ──
os.environ["GAMEGROUPS_ENFORCE_PLAYER_ORDER"] = "false"
os.environ["GAMEGROUPS_LOG_LEVEL"] = "DEBUG"


@pytest.fixture
def valid_payload():
    """Return a minimal update payload that satisfies every rule."""
    return {
        "campaignName": "ABC",
        "gameSystem": "D&D",
        "shortDescription": "Quick one-shot",
        "visibility": "PUBLIC",
        "accessRule": "FREE",
        "modality": "ONLINE",
    }


@pytest.fixture
def full_payload(valid_payload):
    """Return an update payload with every optional field filled in."""
    return {
        **valid_payload,
        "description": "A long-running campaign along the Sword Coast.",
        "settingWorld": "Forgotten Realms",
        "minPlayers": 3,
        "maxPlayers": 5,
        "country": "Brasil",
        "state": "SP",
        "city": "Campinas",
        "themesContent": "Horror, political intrigue",
        "punctualityAttendance": "Sessions start at 19h sharp",
        "houseRules": "Critical fumbles on natural 1",
        "behavioralExpectations": "No phones at the table",
    }
