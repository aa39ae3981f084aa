"""Estimation strategies.

The strategies share histogram construction and differ only in how the
histogram is reduced to a (hue, tolerance) pair.
"""

from dataclasses import dataclass
from enum import Enum

from ..color import DEFAULT_PERCENTILE, DEFAULT_TOLERANCE


class EstimationStrategy(Enum):
    """How the hue histogram is reduced to a dominant color."""

    MODE = "mode"  # Most populated bucket, caller-fixed tolerance
    PERCENTILE = "percentile"  # Percentile bucket, population stddev as tolerance


@dataclass(frozen=True)
class EstimationConfig:
    """Selected strategy and its parameters."""

    strategy: EstimationStrategy = EstimationStrategy.PERCENTILE
    percentile: float = DEFAULT_PERCENTILE
    """Percentile used by the PERCENTILE strategy (0-100)."""

    tolerance: float = DEFAULT_TOLERANCE
    """Fixed tolerance in degrees used by the MODE strategy."""

    def __post_init__(self) -> None:
        if not 0.0 <= self.percentile <= 100.0:
            raise ValueError(f"Percentile must be within [0, 100], got {self.percentile}")
        if not self.tolerance >= 0.0:
            raise ValueError(f"Tolerance must be non-negative, got {self.tolerance}")

    @classmethod
    def mode(cls, tolerance: float = DEFAULT_TOLERANCE) -> "EstimationConfig":
        return cls(strategy=EstimationStrategy.MODE, tolerance=tolerance)

    @classmethod
    def percentile_based(cls, percentile: float = DEFAULT_PERCENTILE) -> "EstimationConfig":
        return cls(strategy=EstimationStrategy.PERCENTILE, percentile=percentile)
