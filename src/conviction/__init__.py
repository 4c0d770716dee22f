# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Conviction - conviction-voting math for governance proposals.

Conviction is a time-decayed accumulation of stake weight. A proposal
passes once its conviction reaches a threshold derived from the funds it
requests.

Architecture:
  Stake ledger (ordered events with embedded on-chain checkpoints)
    → Replay (rebuild checkpoints for filtered views, e.g. one entity)
    → Queries (current value, sampled history, trend)
    → Thresholds (passing threshold, time to pass, minimum stake)

Everything in ``conviction.core`` is a pure function over caller-supplied
events, parameters and current time. There is no I/O and no shared
mutable state.
"""

__version__ = "1.0.0"

from . import (
    core as core,
)
