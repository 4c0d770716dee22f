# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Cross-check of ledger checkpoints against a local replay.

The ledger's ``conviction`` fields come from the on-chain fixed-point
calculation. Replaying the same events with :func:`conviction_from_stakes`
must land on exactly the same float; any difference means the local
formula has drifted from the contract.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import ConvictionMismatchError
from .models import StakeEvent
from .reconstruction import conviction_from_stakes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvictionCheck:
    """Outcome of comparing the ledger checkpoint with a replay."""

    matches: bool
    embedded: float | None
    replayed: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": self.matches,
            "embedded": self.embedded,
            "replayed": self.replayed,
        }


def check_conviction_implementation(
    stakes: Sequence[StakeEvent],
    alpha: float,
    strict: bool = False,
) -> ConvictionCheck:
    """Compare the last event's embedded conviction with a full replay.

    Args:
        stakes: The proposal's complete ledger, in chronological order.
        alpha: Decay constant the ledger was produced with.
        strict: Raise instead of only logging on mismatch.

    Returns:
        ConvictionCheck. An empty ledger always matches.

    Raises:
        ConvictionMismatchError: On mismatch when ``strict`` is set.
    """
    replayed = conviction_from_stakes(stakes, alpha).conviction
    if not stakes:
        return ConvictionCheck(matches=True, embedded=None, replayed=replayed)

    embedded = stakes[-1].conviction
    if embedded == replayed:
        return ConvictionCheck(matches=True, embedded=embedded, replayed=replayed)

    logger.error(
        f"Mismatch between ledger and local conviction calculation: {embedded!r} != {replayed!r}",
        extra={"extra_data": {"embedded": embedded, "replayed": replayed, "stakes": len(stakes)}},
    )
    if strict:
        raise ConvictionMismatchError(embedded, replayed)
    return ConvictionCheck(matches=False, embedded=embedded, replayed=replayed)
