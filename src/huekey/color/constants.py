"""Policy constants shared by estimation and compositing."""

MIN_KEY_SATURATION = 0.4
"""Pixels below this saturation are never keyed; their hue is noise."""

MIN_KEY_VALUE = 0.1
"""Pixels below this value (brightness) are never keyed."""

HUE_BUCKETS = 361
"""One bucket per integer degree, 0..360 inclusive. Bucket 360 is terminal."""

DEFAULT_PERCENTILE = 30.0
"""Default percentile of the hue distribution used as the key hue."""

DEFAULT_TOLERANCE = 20.0
"""Default fixed tolerance (degrees) for the mode strategy."""
