"""Color space conversion and keying thresholds."""

from .constants import (
    DEFAULT_PERCENTILE,
    DEFAULT_TOLERANCE,
    HUE_BUCKETS,
    MIN_KEY_SATURATION,
    MIN_KEY_VALUE,
)
from .conversion import as_pixel_array, pixel_to_hsv, rgb_to_hsv, srgb_to_linear

__all__ = [
    "as_pixel_array",
    "pixel_to_hsv",
    "rgb_to_hsv",
    "srgb_to_linear",
    "DEFAULT_PERCENTILE",
    "DEFAULT_TOLERANCE",
    "HUE_BUCKETS",
    "MIN_KEY_SATURATION",
    "MIN_KEY_VALUE",
]
