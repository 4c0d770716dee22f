# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Trend and threshold algebra.

Degenerate inputs produce ``nan`` or ``inf`` instead of raising, matching
the float behaviour the consuming layer was written against:

- ``get_remaining_time_to_pass`` returns ``nan`` when the stake can never
  reach the threshold and a negative number when it already has.
- ``calculate_threshold`` returns ``inf`` for requests of ``beta`` or more
  of the funds.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

from .history import get_current_conviction
from .models import StakeEvent, ThresholdParameters


class PassingOutlook(str, Enum):
    """Interpretation of a remaining-time-to-pass value."""

    PASSED = "passed"
    PENDING = "pending"
    UNREACHABLE = "unreachable"


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: zero denominators give ``±inf`` or ``nan``."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _log(value: float) -> float:
    """Natural log extended to ``nan`` for negatives and ``-inf`` at zero."""
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    if math.isinf(value):
        return math.inf
    return math.log(value)


def get_conviction_trend(
    stakes: Sequence[StakeEvent],
    max_conviction: float,
    time: int,
    alpha: float,
    time_unit: int = 5,
) -> float:
    """Change in conviction over the next ``time_unit`` ticks.

    Normalised by ``max_conviction``, so it usually lies in ``[-1, 1]``.
    """
    current_conviction = get_current_conviction(stakes, time, alpha)
    future_conviction = get_current_conviction(stakes, time + time_unit, alpha)
    return _divide(future_conviction - current_conviction, max_conviction)


def get_remaining_time_to_pass(threshold: float, conviction: float, amount: float, alpha: float) -> float:
    """Ticks until conviction reaches ``threshold`` at a constant stake.

    Inverts the decay formula for ``t``.

    Args:
        threshold: Conviction needed for the proposal to pass.
        conviction: Current conviction.
        amount: Tokens currently staked.
        alpha: Decay constant.

    Returns:
        Remaining ticks. Negative if ``conviction`` already exceeds
        ``threshold``, ``nan`` if the stake's ceiling
        ``amount / (1 - alpha)`` is below ``threshold``.
    """
    a = alpha
    y = threshold
    y0 = conviction
    x = amount
    ratio = _divide((a - 1) * y + x, (a - 1) * y0 + x)
    return _divide(_log(ratio), _log(a))


def classify_remaining_time(remaining: float) -> PassingOutlook:
    """Map a :func:`get_remaining_time_to_pass` result to an outlook.

    ``+inf`` means the ceiling equals the threshold exactly, which is only
    approached asymptotically, so it counts as unreachable.
    """
    if math.isnan(remaining) or remaining == math.inf:
        return PassingOutlook.UNREACHABLE
    if remaining <= 0:
        return PassingOutlook.PASSED
    return PassingOutlook.PENDING


def calculate_threshold(
    requested: float,
    funds: float,
    supply: float,
    alpha: float,
    beta: float,
    rho: float,
) -> float:
    """Conviction a proposal needs to pass.

    ``threshold = rho * supply / (1 - alpha) / (beta - requested / funds) ** 2``

    Args:
        requested: Funds requested.
        funds: Total funds available.
        supply: Supply of the staked token.
        alpha: Decay constant.
        beta: Maximum share of funds a proposal can take.
        rho: Linear tuning parameter.

    Returns:
        Threshold, or ``inf`` when ``requested / funds >= beta``.
    """
    share = _divide(requested, funds)
    if share < beta:
        return (rho * supply) / (1 - alpha) / (beta - share) ** 2
    return math.inf


def threshold_for(params: ThresholdParameters, alpha: float) -> float:
    """:func:`calculate_threshold` for a ThresholdParameters value."""
    return calculate_threshold(params.requested, params.funds, params.supply, alpha, params.beta, params.rho)


def get_min_needed_stake(threshold: float, alpha: float) -> float:
    """Smallest constant stake whose conviction ceiling reaches ``threshold``.

    Obtained by solving ``y = x / (1 - a)`` for ``x``.
    """
    y = threshold
    a = alpha
    return -a * y + y


def get_max_conviction(amount: float, alpha: float) -> float:
    """Limit of conviction as ``t`` grows for a constant stake ``amount``.

    With the token supply as ``amount`` this is the 100% mark for display.
    """
    x = amount
    a = alpha
    return x / (1 - a)
