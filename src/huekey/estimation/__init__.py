"""Dominant hue estimation from a hue histogram."""

from .estimator import DominantColor, estimate_dominant_color, reduce_histogram
from .histogram import HueHistogram
from .strategy import EstimationConfig, EstimationStrategy

__all__ = [
    "DominantColor",
    "EstimationConfig",
    "EstimationStrategy",
    "HueHistogram",
    "estimate_dominant_color",
    "reduce_histogram",
]
