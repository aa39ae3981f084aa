"""huekey: chroma-key background replacement without a supplied key color.

The key hue is estimated from the image's own hue histogram, then every pixel
within tolerance of it (and saturated and bright enough) is replaced by the
matching pixel of a background image.
"""

__version__ = "0.1.0"

from .compositing import composite, key_mask
from .estimation import (
    DominantColor,
    EstimationConfig,
    EstimationStrategy,
    HueHistogram,
    estimate_dominant_color,
)
from .exceptions import DecodeError, EncodeError, EstimationError, HueKeyError, InputError
from .pipeline import ReplaceJob, replace_background

__all__ = [
    "__version__",
    "composite",
    "key_mask",
    "DominantColor",
    "EstimationConfig",
    "EstimationStrategy",
    "HueHistogram",
    "estimate_dominant_color",
    "HueKeyError",
    "InputError",
    "DecodeError",
    "EstimationError",
    "EncodeError",
    "ReplaceJob",
    "replace_background",
]
