"""Configuration management for huekey using pydantic-settings.

Values come from ``HUEKEY_*`` environment variables or a ``.env`` file.
Command line flags override them.
"""

from typing import TYPE_CHECKING, Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from ..color import DEFAULT_PERCENTILE, DEFAULT_TOLERANCE

if TYPE_CHECKING:
    from ..estimation.strategy import EstimationConfig


class HueKeySettings(BaseSettings):
    """Main configuration settings for huekey."""

    # Estimation settings
    strategy: Literal["percentile", "mode"] = Field(
        "percentile", description="How the hue histogram is reduced to a key hue"
    )
    percentile: float = Field(
        DEFAULT_PERCENTILE,
        ge=0.0,
        le=100.0,
        description="Histogram percentile used as the key hue (percentile strategy)",
    )
    tolerance: float = Field(
        DEFAULT_TOLERANCE, ge=0.0, description="Fixed hue tolerance in degrees (mode strategy)"
    )

    # Logging settings
    log_level: str = Field("INFO", description="Log level")
    structured_logs: bool = Field(False, description="Emit JSON log lines")

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_prefix = "HUEKEY_"
        case_sensitive = False
        extra = "ignore"

    def to_estimation_config(
        self,
        strategy: str | None = None,
        percentile: float | None = None,
        tolerance: float | None = None,
    ) -> "EstimationConfig":
        """Build an estimation config, letting explicit arguments win over settings."""
        from ..estimation.strategy import EstimationConfig, EstimationStrategy

        return EstimationConfig(
            strategy=EstimationStrategy(strategy or self.strategy),
            percentile=self.percentile if percentile is None else percentile,
            tolerance=self.tolerance if tolerance is None else tolerance,
        )


# Singleton instance
_settings: HueKeySettings | None = None


def get_settings() -> HueKeySettings:
    """Get the singleton settings instance."""
    global _settings

    if _settings is None:
        _settings = HueKeySettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
