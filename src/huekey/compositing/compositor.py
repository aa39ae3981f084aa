"""Hue-keyed pixel substitution.

Each output pixel depends only on the source and background pixels at the
same coordinate. A source pixel is keyed when its hue falls inside the
dominant color's band and it is saturated and bright enough for the hue to be
meaningful; keyed pixels are replaced by the background pixel, everything else
passes through untouched.
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ..color import MIN_KEY_SATURATION, MIN_KEY_VALUE, as_pixel_array, rgb_to_hsv
from ..estimation import DominantColor
from ..logging import SpanProfiler, get_logger

logger = get_logger(__name__)


def to_rgba(pixels: NDArray[Any]) -> NDArray[np.uint8]:
    """Return an RGBA copy of an RGB or RGBA buffer. Missing alpha is opaque."""
    if pixels.shape[-1] == 4:
        return pixels.astype(np.uint8, copy=True)

    alpha = np.full(pixels.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([pixels.astype(np.uint8), alpha], axis=-1)


def key_mask(
    pixels: NDArray[Any] | Iterable[tuple[int, ...]], color: DominantColor
) -> NDArray[np.bool_]:
    """Boolean mask of pixels that should be replaced by the background.

    Args:
        pixels: Source pixels, RGB or RGBA
        color: Key hue and tolerance

    Returns:
        Mask with the pixel buffer's leading shape
    """
    hsv = rgb_to_hsv(pixels)
    hue, saturation, value = hsv[..., 0], hsv[..., 1], hsv[..., 2]

    # Linear distance, same as DominantColor.contains
    in_band = np.abs(color.hue - hue) <= color.tolerance
    return in_band & (saturation >= MIN_KEY_SATURATION) & (value >= MIN_KEY_VALUE)


def composite(
    source: NDArray[Any] | Iterable[tuple[int, ...]],
    color: DominantColor,
    background: NDArray[Any] | Iterable[tuple[int, ...]],
    profiler: SpanProfiler | None = None,
) -> NDArray[np.uint8]:
    """Replace keyed source pixels with the background pixel at the same coordinate.

    Args:
        source: Source pixels, RGB or RGBA
        color: Dominant color from the estimator
        background: Background pixels in the same raster order and shape
        profiler: Optional profiler receiving a "merge" span

    Returns:
        RGBA ``uint8`` array with the source's leading shape

    Raises:
        ValueError: If source and background do not have the same dimensions
    """
    profiler = profiler or SpanProfiler(enabled=False)

    with profiler.span("merge"):
        source_pixels = as_pixel_array(source)
        background_pixels = as_pixel_array(background)

        if source_pixels.shape[:-1] != background_pixels.shape[:-1]:
            raise ValueError(
                "Background dimensions must match the source: "
                f"{background_pixels.shape[:-1]} != {source_pixels.shape[:-1]}"
            )

        mask = key_mask(source_pixels, color)
        output = to_rgba(source_pixels)
        output[mask] = to_rgba(background_pixels)[mask]

    logger.debug(
        "composited",
        keyed_pixels=int(mask.sum()),
        total_pixels=int(mask.size),
    )
    return output
