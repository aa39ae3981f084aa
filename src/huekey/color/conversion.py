"""RGB to HSV conversion.

Converts 8-bit gamma-encoded sRGB pixels to hue/saturation/value. Channels are
normalised to [0, 1], linearised with the sRGB transfer function and then
mapped onto the hexcone model in float64, so identical input always produces
identical output.

- Hue: degrees in [0, 360). Achromatic pixels have hue 0.
- Saturation: 0-1
- Value: 0-1
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray


def as_pixel_array(pixels: NDArray[Any] | Iterable[tuple[int, ...]]) -> NDArray[np.uint8]:
    """Coerce a pixel stream into a ``uint8`` array with a trailing channel axis.

    Args:
        pixels: Array shaped (H, W, C) or (N, C), or an iterable of RGB/RGBA tuples

    Returns:
        ``uint8`` array with 3 or 4 channels in the last axis

    Raises:
        ValueError: If the channel count is not 3 or 4
    """
    if isinstance(pixels, np.ndarray):
        array = pixels
    else:
        array = np.asarray(list(pixels), dtype=np.uint8)
        if array.size == 0:
            array = array.reshape(0, 3)

    if array.ndim < 2 or array.shape[-1] not in (3, 4):
        raise ValueError(f"Expected RGB or RGBA pixels, got array of shape {array.shape}")

    return array.astype(np.uint8, copy=False)


def srgb_to_linear(channels: NDArray[Any]) -> NDArray[np.float64]:
    """Decode 8-bit sRGB channel values to linear light in [0, 1]."""
    encoded = channels.astype(np.float64) / 255.0
    return np.where(
        encoded <= 0.04045,
        encoded / 12.92,
        ((encoded + 0.055) / 1.055) ** 2.4,
    )


def rgb_to_hsv(pixels: NDArray[Any] | Iterable[tuple[int, ...]]) -> NDArray[np.float64]:
    """Convert RGB(A) pixels to HSV.

    Alpha, when present, is ignored.

    Args:
        pixels: Pixel buffer accepted by :func:`as_pixel_array`

    Returns:
        float64 array with the same leading shape and a trailing axis of
        (hue, saturation, value)
    """
    rgb = srgb_to_linear(as_pixel_array(pixels)[..., :3])
    red, green, blue = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    value = rgb.max(axis=-1)
    chroma = value - rgb.min(axis=-1)

    # Avoid dividing by zero for achromatic pixels; their hue is forced to 0
    safe_chroma = np.where(chroma > 0, chroma, 1.0)
    hue = np.select(
        [value == red, value == green],
        [
            np.mod((green - blue) / safe_chroma, 6.0),
            (blue - red) / safe_chroma + 2.0,
        ],
        default=(red - green) / safe_chroma + 4.0,
    )
    hue = np.where(chroma > 0, hue * 60.0, 0.0)
    # mod() of a tiny negative number can round up to exactly 6
    hue = np.where(hue >= 360.0, hue - 360.0, hue)

    saturation = np.where(value > 0, chroma / np.where(value > 0, value, 1.0), 0.0)

    return np.stack([hue, saturation, value], axis=-1)


def pixel_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Convert a single RGB pixel to an (hue, saturation, value) tuple."""
    hue, saturation, value = rgb_to_hsv(np.array([[red, green, blue]], dtype=np.uint8))[0]
    return float(hue), float(saturation), float(value)
