"""Core configuration - centralized config for the conviction package.

Default decay and threshold parameters plus logging settings are read from
the environment here. The math functions never consult these settings; they
take every parameter as an argument. Settings exist for callers that want
deployment-wide defaults.

Usage:
    from conviction.core.config import get_config
    config = get_config()

    params = config.decay_parameters()
    history = get_conviction_history(stakes, now, params.alpha, params.time_unit)
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigException
from .models import DecayParameters, ThresholdParameters


class ConvictionSettings(BaseSettings):
    """Configuration settings for Conviction.

    All settings use the CONVICTION_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # DECAY SETTINGS
    # ==========================================================================

    alpha: float = Field(
        default=0.9,
        gt=0.0,
        lt=1.0,
        description="Per-tick conviction retention factor",
        validation_alias="CONVICTION_ALPHA",
    )
    time_unit: int = Field(
        default=1,
        ge=1,
        description="Ticks per history sample",
        validation_alias="CONVICTION_TIME_UNIT",
    )
    trend_time_unit: int = Field(
        default=5,
        ge=1,
        description="Look-ahead in ticks for conviction trend",
        validation_alias="CONVICTION_TREND_TIME_UNIT",
    )

    # ==========================================================================
    # THRESHOLD SETTINGS
    # ==========================================================================

    beta: float = Field(
        default=0.2,
        gt=0.0,
        lt=1.0,
        description="Maximum share of funds a single proposal may request",
        validation_alias="CONVICTION_BETA",
    )
    rho: float = Field(
        default=0.002,
        gt=0.0,
        description="Linear threshold tuning constant",
        validation_alias="CONVICTION_RHO",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="CONVICTION_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="CONVICTION_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="CONVICTION_LOG_FILE",
    )

    # ==========================================================================
    # COMPUTED VALUES
    # ==========================================================================

    def decay_parameters(self) -> DecayParameters:
        """Decay parameters built from settings."""
        return DecayParameters(alpha=self.alpha, time_unit=self.time_unit)

    def threshold_parameters(self, requested: float, funds: float, supply: float) -> ThresholdParameters:
        """Threshold parameters for a funding request, using configured beta and rho."""
        return ThresholdParameters(
            requested=requested,
            funds=funds,
            supply=supply,
            beta=self.beta,
            rho=self.rho,
        )


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: ConvictionSettings | None = None


def load_settings() -> ConvictionSettings:
    """Build settings from the environment.

    Raises:
        ConfigException: If any setting fails validation.
    """
    try:
        return ConvictionSettings()
    except ValidationError as e:
        invalid = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
        raise ConfigException(f"Invalid conviction settings: {e.error_count()} error(s)", missing_vars=invalid) from e


def get_config() -> ConvictionSettings:
    """Get the global configuration instance.

    Returns:
        The singleton ConvictionSettings instance.
    """
    global _config
    if _config is None:
        _config = load_settings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
