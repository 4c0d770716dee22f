"""Global test fixtures for the Conviction test suite."""

from __future__ import annotations

import os

import pytest

from conviction.core.config import clear_config_cache
from conviction.core.models import StakeEvent
from conviction.core.reconstruction import with_replayed_convictions

ALPHA = 0.9


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all CONVICTION_ environment variables and reset settings."""
    for key in list(os.environ.keys()):
        if key.startswith("CONVICTION_"):
            monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env out of the settings under test
    monkeypatch.chdir(os.path.dirname(__file__))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def alpha() -> float:
    return ALPHA


@pytest.fixture
def ledger() -> list[StakeEvent]:
    """A two-staker proposal ledger with consistent embedded checkpoints.

    alice stakes 100 at block 10, bob adds 50 at block 25,
    alice withdraws to 40 at block 40.
    """
    raw = [
        StakeEvent(time=10, entity="alice", tokens_staked=100, total_tokens_staked=100, proposal=1),
        StakeEvent(time=25, entity="bob", tokens_staked=50, total_tokens_staked=150, proposal=1),
        StakeEvent(time=40, entity="alice", tokens_staked=40, total_tokens_staked=90, proposal=1),
    ]
    return with_replayed_convictions(raw, ALPHA)
