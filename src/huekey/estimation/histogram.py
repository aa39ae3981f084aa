"""Hue histogram.

A fixed arena of 361 counters, one per integer degree 0..360. Hues are
rounded half away from zero before bucketing, so anything from 359.5 up
lands in the terminal bucket 360 rather than wrapping to 0.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ..color import HUE_BUCKETS, rgb_to_hsv
from ..exceptions import EstimationError

SUMMARY_PERCENTILES = (50.0, 90.0, 99.0, 99.9)


@dataclass
class HueHistogram:
    """Counts of pixel hues per integer degree."""

    counts: NDArray[np.int64] = field(
        default_factory=lambda: np.zeros(HUE_BUCKETS, dtype=np.int64)
    )

    def __post_init__(self) -> None:
        if self.counts.shape != (HUE_BUCKETS,):
            raise ValueError(
                f"Histogram needs {HUE_BUCKETS} buckets, got shape {self.counts.shape}"
            )

    @classmethod
    def from_hues(cls, hues: NDArray[Any] | Iterable[float]) -> "HueHistogram":
        """Build a histogram from hue angles in degrees.

        Args:
            hues: Hues in [0, 360)

        Returns:
            New histogram
        """
        # Round half up; hues are non-negative so this is round-half-away-from-zero
        buckets = np.floor(np.asarray(hues, dtype=np.float64).ravel() + 0.5).astype(np.int64)
        if buckets.size and (buckets.min() < 0 or buckets.max() >= HUE_BUCKETS):
            raise ValueError("Hue values must lie within [0, 360]")
        return cls(np.bincount(buckets, minlength=HUE_BUCKETS).astype(np.int64))

    @classmethod
    def from_pixels(cls, pixels: NDArray[Any] | Iterable[tuple[int, ...]]) -> "HueHistogram":
        """Build a histogram from RGB(A) pixels. Alpha is ignored."""
        return cls.from_hues(rgb_to_hsv(pixels)[..., 0])

    def merge(self, other: "HueHistogram") -> "HueHistogram":
        """Combine two partial histograms by element-wise summation."""
        return HueHistogram(self.counts + other.counts)

    @property
    def total(self) -> int:
        """Number of hues recorded."""
        return int(self.counts.sum())

    def is_empty(self) -> bool:
        return self.total == 0

    def _require_data(self) -> None:
        if self.is_empty():
            raise EstimationError("Hue histogram is empty")

    def minimum(self) -> int:
        self._require_data()
        return int(np.flatnonzero(self.counts)[0])

    def maximum(self) -> int:
        self._require_data()
        return int(np.flatnonzero(self.counts)[-1])

    def mean(self) -> float:
        self._require_data()
        degrees = np.arange(HUE_BUCKETS, dtype=np.float64)
        return float((degrees * self.counts).sum() / self.total)

    def stddev(self) -> float:
        """Population standard deviation of the bucketed hues."""
        self._require_data()
        degrees = np.arange(HUE_BUCKETS, dtype=np.float64)
        deviation = degrees - self.mean()
        return math.sqrt(float((deviation * deviation * self.counts).sum() / self.total))

    def mode(self) -> int:
        """Most populated bucket. The lowest bucket wins ties."""
        self._require_data()
        return int(np.argmax(self.counts))

    def percentile(self, percentile: float) -> int:
        """Nearest-rank percentile of the bucketed hues.

        The rank is ``max(1, ceil(percentile / 100 * total))`` and the result is
        the first bucket whose cumulative count reaches it.

        Args:
            percentile: Percentile to calculate (0-100)

        Returns:
            Bucket (integer degree)
        """
        if not 0.0 <= percentile <= 100.0:
            raise ValueError(f"Percentile must be within [0, 100], got {percentile}")
        self._require_data()

        rank = max(1, math.ceil(percentile / 100.0 * self.total))
        cumulative = np.cumsum(self.counts)
        return int(np.searchsorted(cumulative, rank, side="left"))

    def summary(self) -> dict[str, float]:
        """Diagnostic statistics: min/mean/max/stddev and selected percentiles."""
        stats: dict[str, float] = {
            "count": self.total,
            "min": self.minimum(),
            "mean": self.mean(),
            "max": self.maximum(),
            "stddev": self.stddev(),
        }
        for percentile in SUMMARY_PERCENTILES:
            stats[f"p{percentile:g}"] = self.percentile(percentile)
        return stats
