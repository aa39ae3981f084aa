"""Dominant hue estimation."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from numpy.typing import NDArray

from ..color import as_pixel_array
from ..exceptions import EstimationError
from ..logging import SpanProfiler, get_logger
from .histogram import HueHistogram
from .strategy import EstimationConfig, EstimationStrategy

logger = get_logger(__name__)


@dataclass(frozen=True)
class DominantColor:
    """Key hue and the width of the accepted band around it, in degrees."""

    hue: float
    tolerance: float

    def contains(self, hue: float) -> bool:
        """Whether ``hue`` lies within the band.

        The distance is linear, not circular: hues either side of the 0/360
        boundary are not treated as neighbours.
        """
        return abs(self.hue - hue) <= self.tolerance


def reduce_histogram(histogram: HueHistogram, config: EstimationConfig) -> DominantColor:
    """Reduce a histogram to a dominant color using the configured strategy.

    Raises:
        EstimationError: If the histogram is empty
    """
    if histogram.is_empty():
        raise EstimationError("Cannot estimate dominant hue from an empty pixel stream")

    if config.strategy is EstimationStrategy.MODE:
        return DominantColor(hue=float(histogram.mode()), tolerance=config.tolerance)
    elif config.strategy is EstimationStrategy.PERCENTILE:
        return DominantColor(
            hue=float(histogram.percentile(config.percentile)),
            tolerance=histogram.stddev(),
        )
    else:
        raise ValueError(f"Unknown estimation strategy: {config.strategy}")


def estimate_dominant_color(
    pixels: NDArray[Any] | Iterable[tuple[int, ...]],
    config: EstimationConfig | None = None,
    profiler: SpanProfiler | None = None,
) -> DominantColor:
    """Estimate the background hue of an image.

    Args:
        pixels: Source pixels, RGB or RGBA, any leading shape
        config: Strategy selection; defaults to the 30th percentile strategy
        profiler: Optional profiler receiving "histogram" and "reduce" spans

    Returns:
        Dominant color (hue, tolerance)

    Raises:
        EstimationError: If there are no pixels
    """
    config = config or EstimationConfig()
    profiler = profiler or SpanProfiler(enabled=False)

    with profiler.span("dominant_color"):
        array = as_pixel_array(pixels)
        if array.size == 0:
            raise EstimationError("Cannot estimate dominant hue from an empty pixel stream")

        with profiler.span("histogram"):
            histogram = HueHistogram.from_pixels(array)

        logger.info("hue_histogram", **histogram.summary())

        with profiler.span("reduce"):
            color = reduce_histogram(histogram, config)

    logger.info(
        "dominant_color",
        strategy=config.strategy.value,
        hue=color.hue,
        tolerance=color.tolerance,
    )
    return color
