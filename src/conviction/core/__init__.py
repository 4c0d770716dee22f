"""Conviction Core - decay math, history replay and threshold algebra."""

from .config import ConvictionSettings, clear_config_cache, get_config
from .decay import calculate_conviction
from .exceptions import (
    ConfigException,
    ConvictionException,
    ConvictionMismatchError,
    ValidationException,
)
from .history import (
    HISTORY_WINDOW,
    get_conviction_history,
    get_conviction_history_by_entity,
    get_current_conviction,
    get_current_conviction_by_entity,
)
from .logging import configure_logging, get_logger
from .models import Checkpoint, DecayParameters, StakeEvent, ThresholdParameters
from .reconstruction import (
    conviction_from_stakes,
    stakes_by_entity,
    stakes_by_proposal,
    with_replayed_convictions,
)
from .thresholds import (
    PassingOutlook,
    calculate_threshold,
    classify_remaining_time,
    get_conviction_trend,
    get_max_conviction,
    get_min_needed_stake,
    get_remaining_time_to_pass,
    threshold_for,
)
from .verification import ConvictionCheck, check_conviction_implementation

__all__ = [
    # Models
    "StakeEvent",
    "Checkpoint",
    "DecayParameters",
    "ThresholdParameters",
    # Decay
    "calculate_conviction",
    # Queries
    "HISTORY_WINDOW",
    "get_current_conviction",
    "get_current_conviction_by_entity",
    "get_conviction_history",
    "get_conviction_history_by_entity",
    # Reconstruction
    "conviction_from_stakes",
    "stakes_by_entity",
    "stakes_by_proposal",
    "with_replayed_convictions",
    # Thresholds
    "PassingOutlook",
    "calculate_threshold",
    "classify_remaining_time",
    "get_conviction_trend",
    "get_max_conviction",
    "get_min_needed_stake",
    "get_remaining_time_to_pass",
    "threshold_for",
    # Verification
    "ConvictionCheck",
    "check_conviction_implementation",
    # Config
    "ConvictionSettings",
    "get_config",
    "clear_config_cache",
    # Logging
    "configure_logging",
    "get_logger",
    # Exceptions
    "ConvictionException",
    "ConfigException",
    "ConvictionMismatchError",
    "ValidationException",
]
