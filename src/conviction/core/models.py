# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Value types consumed and produced by the conviction engine.

All types are frozen: callers construct them from ledger data, pass them
in, and get new values back. Nothing in the engine mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationException

# Indexer field name -> dataclass attribute
_CAMEL_FIELDS = {
    "tokensStaked": "tokens_staked",
    "totalTokensStaked": "total_tokens_staked",
}


@dataclass(frozen=True)
class StakeEvent:
    """A single stake change recorded on a proposal.

    Attributes:
        time: Block/tick at which the change was recorded.
        entity: Identifier of the staking account.
        tokens_staked: The entity's own stake after this event.
        total_tokens_staked: Proposal-wide stake right after this event.
        conviction: Conviction at ``time`` before the amount changed.
        proposal: Proposal id, when the ledger mixes several proposals.
    """

    time: int
    entity: str = ""
    tokens_staked: int = 0
    total_tokens_staked: int = 0
    conviction: float = 0.0
    proposal: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StakeEvent:
        """Create from an indexer record.

        Accepts both the indexer's camelCase keys (``tokensStaked``,
        ``totalTokensStaked``) and snake_case keys.

        Raises:
            ValidationException: If ``time`` is missing or a numeric field
                cannot be converted.
        """
        values = {_CAMEL_FIELDS.get(key, key): value for key, value in data.items()}
        if values.get("time") is None:
            raise ValidationException("Stake event has no time", field="time")

        try:
            proposal = values.get("proposal")
            return cls(
                time=int(values["time"]),
                entity=str(values.get("entity", "")),
                tokens_staked=int(values.get("tokens_staked", 0)),
                total_tokens_staked=int(values.get("total_tokens_staked", 0)),
                conviction=float(values.get("conviction", 0.0)),
                proposal=int(proposal) if proposal is not None else None,
            )
        except (TypeError, ValueError) as e:
            raise ValidationException(f"Malformed stake event: {e}", value=data) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to the indexer's camelCase record shape."""
        result: dict[str, Any] = {
            "time": self.time,
            "entity": self.entity,
            "tokensStaked": self.tokens_staked,
            "totalTokensStaked": self.total_tokens_staked,
            "conviction": self.conviction,
        }
        if self.proposal is not None:
            result["proposal"] = self.proposal
        return result


@dataclass(frozen=True)
class Checkpoint:
    """State sufficient to continue the conviction recurrence forward."""

    conviction: float = 0.0
    time: int = 0
    total_tokens_staked: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "conviction": self.conviction,
            "time": self.time,
            "totalTokensStaked": self.total_tokens_staked,
        }


@dataclass(frozen=True)
class DecayParameters:
    """Decay constant and history sampling resolution.

    Attributes:
        alpha: Per-tick retention factor, ``0 < alpha < 1``.
        time_unit: Ticks between history samples.
    """

    alpha: float
    time_unit: int = 1


@dataclass(frozen=True)
class ThresholdParameters:
    """Funding request parameters that determine a proposal's threshold.

    Attributes:
        requested: Funds requested by the proposal.
        funds: Total funds available.
        supply: Token supply eligible to stake.
        beta: Maximum share of funds a single proposal may request.
        rho: Linear tuning constant.
    """

    requested: float
    funds: float
    supply: float
    beta: float
    rho: float
