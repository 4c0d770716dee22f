"""Tests for conviction.core.reconstruction."""

from __future__ import annotations

from conviction.core.decay import calculate_conviction
from conviction.core.models import Checkpoint, StakeEvent
from conviction.core.reconstruction import (
    conviction_from_stakes,
    stakes_by_entity,
    stakes_by_proposal,
    with_replayed_convictions,
)


class TestConvictionFromStakes:
    """Tests for conviction_from_stakes()."""

    def test_empty_returns_zero_checkpoint(self):
        checkpoint = conviction_from_stakes([], 0.9)
        assert checkpoint == Checkpoint(conviction=0, time=0, total_tokens_staked=0)

    def test_first_event_has_zero_conviction(self):
        """Nothing was staked before the first event."""
        checkpoint = conviction_from_stakes([StakeEvent(time=7, total_tokens_staked=100)], 0.9)
        assert checkpoint.conviction == 0
        assert checkpoint.time == 7
        assert checkpoint.total_tokens_staked == 100

    def test_uses_previous_amount_between_events(self):
        stakes = [
            StakeEvent(time=0, total_tokens_staked=100),
            StakeEvent(time=10, total_tokens_staked=30),
            StakeEvent(time=15, total_tokens_staked=60),
        ]
        expected = calculate_conviction(5, calculate_conviction(10, 0, 100, 0.9), 30, 0.9)

        checkpoint = conviction_from_stakes(stakes, 0.9)

        assert checkpoint.conviction == expected
        assert checkpoint.time == 15
        assert checkpoint.total_tokens_staked == 60

    def test_ignores_embedded_conviction(self):
        stakes = [
            StakeEvent(time=0, total_tokens_staked=100, conviction=999),
            StakeEvent(time=4, total_tokens_staked=100, conviction=-1),
        ]
        assert conviction_from_stakes(stakes, 0.5).conviction == calculate_conviction(4, 0, 100, 0.5)


class TestWithReplayedConvictions:
    """Tests for with_replayed_convictions()."""

    def test_fills_each_event(self):
        raw = [
            StakeEvent(time=5, entity="a", total_tokens_staked=10),
            StakeEvent(time=9, entity="b", total_tokens_staked=25),
        ]

        replayed = with_replayed_convictions(raw, 0.9)

        assert [s.conviction for s in replayed] == [0, calculate_conviction(4, 0, 10, 0.9)]
        assert [s.entity for s in replayed] == ["a", "b"]

    def test_last_event_matches_checkpoint(self, ledger, alpha):
        assert ledger[-1].conviction == conviction_from_stakes(ledger, alpha).conviction

    def test_checkpoint_is_last_replayed_event(self, ledger, alpha):
        last = with_replayed_convictions(ledger, alpha)[-1]
        assert conviction_from_stakes(ledger, alpha) == Checkpoint(
            conviction=last.conviction, time=last.time, total_tokens_staked=last.total_tokens_staked
        )

    def test_does_not_mutate_input(self):
        raw = [StakeEvent(time=1, total_tokens_staked=10, conviction=42)]
        with_replayed_convictions(raw, 0.9)
        assert raw[0].conviction == 42


class TestStakesByEntity:
    """Tests for stakes_by_entity()."""

    def test_filters_and_uses_entity_stake(self, ledger):
        alice = stakes_by_entity(ledger, "alice")

        assert [s.time for s in alice] == [10, 40]
        assert [s.total_tokens_staked for s in alice] == [100, 40]

    def test_unknown_entity_is_empty(self, ledger):
        assert stakes_by_entity(ledger, "mallory") == []


class TestStakesByProposal:
    """Tests for stakes_by_proposal()."""

    def test_filters_mixed_ledger(self):
        stakes = [
            StakeEvent(time=1, proposal=1),
            StakeEvent(time=2, proposal=2),
            StakeEvent(time=3, proposal=1),
        ]
        assert [s.time for s in stakes_by_proposal(stakes, 1)] == [1, 3]
        assert stakes_by_proposal(stakes, 3) == []
