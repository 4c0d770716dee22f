# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Point-in-time conviction and sampled conviction history.

Two trust paths are kept apart:

- Whole-ledger queries resume from the ``conviction`` checkpoint embedded
  in the last ledger event.
- Per-entity queries rebuild the checkpoint by replay, because the embedded
  value was computed over every staker on the proposal.

Callers must supply events in chronological order; nothing here sorts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .decay import calculate_conviction
from .models import StakeEvent
from .reconstruction import conviction_from_stakes, stakes_by_entity, with_replayed_convictions

logger = logging.getLogger(__name__)

# Number of time units covered by a history window
HISTORY_WINDOW = 50


def get_current_conviction(stakes: Sequence[StakeEvent], current_time: int, alpha: float) -> float:
    """Current conviction on a proposal, from the last ledger checkpoint.

    Args:
        stakes: The proposal's ledger, in chronological order.
        current_time: Current block.
        alpha: Decay constant.

    Returns:
        Conviction at ``current_time``, or ``0`` if there are no stakes.
    """
    if not stakes:
        return 0
    last = stakes[-1]
    return calculate_conviction(current_time - last.time, last.conviction, last.total_tokens_staked, alpha)


def get_current_conviction_by_entity(
    stakes: Sequence[StakeEvent],
    entity: str,
    current_time: int,
    alpha: float,
) -> float:
    """Current conviction contributed by one entity.

    Args:
        stakes: The proposal's ledger, in chronological order.
        entity: Entity whose stakes are counted.
        current_time: Current block.
        alpha: Decay constant.

    Returns:
        Entity conviction at ``current_time``, or ``0`` if it never staked.
    """
    entity_stakes = stakes_by_entity(stakes, entity)
    if not entity_stakes:
        return 0
    checkpoint = conviction_from_stakes(entity_stakes, alpha)
    return calculate_conviction(
        current_time - checkpoint.time,
        checkpoint.conviction,
        checkpoint.total_tokens_staked,
        alpha,
    )


def get_conviction_history(
    stakes: Sequence[StakeEvent],
    current_time: int,
    alpha: float,
    time_unit: int,
) -> list[float]:
    """Conviction sampled every ``time_unit`` ticks over the trailing window.

    The window is ``[current_time - HISTORY_WINDOW * time_unit - 1,
    current_time]``. Ticks before block 0 are emitted as ``0``, so the
    length depends only on ``time_unit`` and the phase of
    ``current_time``.

    When the stake amount changes, the recurrence restarts from the last
    emitted sample rather than from the exact value at the change tick, so
    changes between samples take effect at sample granularity.

    Args:
        stakes: The proposal's ledger, in chronological order.
        current_time: Current block.
        alpha: Decay constant.
        time_unit: Ticks per sample.

    Returns:
        Samples from the window start up to ``current_time``.
    """
    history: list[float] = []
    init_time = current_time - HISTORY_WINDOW * time_unit - 1

    # Pad ticks before block 0
    while init_time < 0:
        if init_time % time_unit == 0:
            history.append(0)
        init_time += 1

    old_stakes = [stake for stake in stakes if stake.time <= init_time]
    recent_stakes = [stake for stake in stakes if stake.time > init_time]

    if old_stakes:
        seed = old_stakes[-1]
        old_amount, last_conv, last_time = seed.total_tokens_staked, seed.conviction, seed.time
    else:
        old_amount, last_conv, last_time = 0, 0, 0
    last_conv = calculate_conviction(init_time - last_time, last_conv, old_amount, alpha)

    # Age of the current amount, reset whenever the stake changes
    time_passed = 0
    i = 0
    for t in range(init_time, current_time + 1):
        if t % time_unit == 0:
            history.append(calculate_conviction(time_passed, last_conv, old_amount, alpha))
        while i < len(recent_stakes) and recent_stakes[i].time <= t:
            if history:
                last_conv = history[-1]
            else:
                # No sample emitted yet in this window
                last_conv = calculate_conviction(time_passed, last_conv, old_amount, alpha)
            old_amount = recent_stakes[i].total_tokens_staked
            time_passed = 0
            i += 1
        time_passed += 1

    logger.debug(
        "Sampled conviction history",
        extra={"extra_data": {"samples": len(history), "stakes": len(stakes), "time": current_time}},
    )
    return history


def get_conviction_history_by_entity(
    stakes: Sequence[StakeEvent],
    entity: str,
    time: int,
    alpha: float,
    time_unit: int,
) -> list[float]:
    """Sampled history of one entity's conviction.

    The projection's conviction fields are rebuilt by replay before
    sampling, so a window that starts after the entity's first stake is
    seeded from the entity's own conviction, not the proposal's.
    """
    entity_stakes = with_replayed_convictions(stakes_by_entity(stakes, entity), alpha)
    return get_conviction_history(entity_stakes, time, alpha, time_unit)
