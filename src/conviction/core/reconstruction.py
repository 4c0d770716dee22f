# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Checkpoint reconstruction by replaying stake events.

The ``conviction`` field embedded in each ledger event was computed over
the whole proposal. Any filtered view of the ledger (one entity's stakes,
say) has to rebuild its own checkpoint by replaying the recurrence from
scratch; the functions here do that.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from .decay import calculate_conviction
from .models import Checkpoint, StakeEvent


def conviction_from_stakes(stakes: Iterable[StakeEvent], alpha: float) -> Checkpoint:
    """Replay events from ``(0, 0, 0)`` and return the final checkpoint.

    For each event the conviction is advanced over the ticks since the
    previous event using the previous amount, then the event's
    ``total_tokens_staked`` becomes the running amount.

    Args:
        stakes: Events in chronological order.
        alpha: Decay constant.

    Returns:
        Checkpoint at the last event, or ``Checkpoint(0, 0, 0)`` for no events.
    """
    replayed = with_replayed_convictions(stakes, alpha)
    if not replayed:
        return Checkpoint()
    last = replayed[-1]
    return Checkpoint(conviction=last.conviction, time=last.time, total_tokens_staked=last.total_tokens_staked)


def with_replayed_convictions(stakes: Iterable[StakeEvent], alpha: float) -> list[StakeEvent]:
    """Copy of ``stakes`` with every ``conviction`` field recomputed by replay.

    Starting from ``(0, 0, 0)``, each event's conviction is the previous one
    advanced over the elapsed ticks at the previous amount.
    """
    replayed: list[StakeEvent] = []
    last_conv = 0.0
    last_time = 0
    old_amount = 0
    for stake in stakes:
        last_conv = calculate_conviction(stake.time - last_time, last_conv, old_amount, alpha)
        last_time = stake.time
        old_amount = stake.total_tokens_staked
        replayed.append(replace(stake, conviction=last_conv))
    return replayed


def stakes_by_entity(stakes: Sequence[StakeEvent], entity: str) -> list[StakeEvent]:
    """One entity's events, tracking that entity's own cumulative stake.

    ``total_tokens_staked`` of each projected event is the entity's
    ``tokens_staked``. The embedded ``conviction`` is carried over but is
    not valid for the projection; use :func:`conviction_from_stakes`.
    """
    return [
        replace(stake, total_tokens_staked=stake.tokens_staked)
        for stake in stakes
        if stake.entity == entity
    ]


def stakes_by_proposal(stakes: Sequence[StakeEvent], proposal: int) -> list[StakeEvent]:
    """Events recorded on ``proposal``, in ledger order."""
    return [stake for stake in stakes if stake.proposal == proposal]
