# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Closed-form conviction decay.

Conviction follows the recurrence ``y(t) = a * y(t-1) + x`` for a constant
stake ``x``. Its closed form,

    y(t) = y0 * a**t + x * (1 - a**t) / (1 - a)

lets the engine jump any number of ticks at once, forwards or backwards.
"""

from __future__ import annotations

import math


def _power(base: float, exponent: float) -> float:
    """``base ** exponent`` that overflows to ``inf`` instead of raising."""
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def calculate_conviction(time_passed: float, init_conv: float, amount: float, alpha: float) -> float:
    """Conviction after ``time_passed`` ticks from a checkpoint.

    A negative ``time_passed`` rewinds the checkpoint through the same
    formula. Rewinding far enough overflows ``a**t`` to ``inf``, giving an
    ``inf`` or ``nan`` result. ``alpha`` must lie in ``(0, 1)``;
    ``alpha == 1`` divides by zero.

    Args:
        time_passed: Ticks since the checkpoint.
        init_conv: Conviction at the checkpoint.
        amount: Tokens staked since the checkpoint.
        alpha: Decay constant.

    Returns:
        Conviction at ``time_passed``.
    """
    t = time_passed
    y0 = init_conv
    x = amount
    a = alpha
    a_t = _power(a, t)
    return y0 * a_t + (x * (1 - a_t)) / (1 - a)
