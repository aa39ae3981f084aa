"""Image decoding, resizing and encoding with Pillow."""

import os
import tempfile
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageOps, UnidentifiedImageError

from ..exceptions import DecodeError, EncodeError
from ..logging import get_logger

logger = get_logger(__name__)

# Formats that cannot store an alpha channel
_ALPHALESS_FORMATS = {"JPEG", "PPM"}


def _default_file_mode() -> int:
    """Mode a newly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask

def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    Args:
        path: Image file path

    Returns:
        Decoded PIL image

    Raises:
        DecodeError: If the file is unreadable or not a recognised image
    """
    try:
        with Image.open(path) as image:
            image.load()
            decoded = image.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Cannot open image {path}", cause=e, image_path=str(path)) from e

    logger.debug("image_loaded", path=str(path), size=decoded.size, mode=decoded.mode)
    return decoded


def to_pixel_array(image: Image.Image) -> NDArray[np.uint8]:
    """Convert an image to an (H, W, 4) RGBA array."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8)


def resize_to_fill(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Resize to exactly ``size`` keeping the aspect ratio, cropping the excess.

    Uses Lanczos resampling. Palette and bilevel images are expanded to RGBA
    first, since Pillow resizes them nearest-neighbour. Images already at ``size``
    are returned unchanged.

    Args:
        image: Image to resize
        size: Target (width, height)

    Returns:
        Image of exactly ``size``
    """
    if image.size == size:
        return image

    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")

    logger.debug("resizing_background", source_size=image.size, target_size=size)
    return ImageOps.fit(image, size, method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def output_format(path: str | Path) -> str:
    """Infer the Pillow format name from a file extension.

    Raises:
        EncodeError: If the extension is missing or unsupported
    """
    extension = Path(path).suffix.lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None or image_format not in Image.SAVE:
        raise EncodeError(
            f"Unsupported output extension {extension or '(none)'!r}", image_path=str(path)
        )
    return image_format


def save_image(pixels: NDArray[Any], path: str | Path) -> Path:
    """Encode an RGBA pixel array to ``path``.

    The image is written to a temporary file next to the target and renamed
    into place, so a failed write never leaves a truncated output.

    Args:
        pixels: (H, W, 4) or (H, W, 3) ``uint8`` array
        path: Output path; the format follows the extension

    Returns:
        The output path

    Raises:
        EncodeError: If the extension is unsupported or the path is unwritable
    """
    path = Path(path)
    image_format = output_format(path)

    image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    if image_format in _ALPHALESS_FORMATS and image.mode != "RGB":
        image = image.convert("RGB")

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=path.suffix, delete=False
        ) as handle:
            temp_name = handle.name
            image.save(handle, format=image_format)
        os.chmod(temp_name, _default_file_mode())
        os.replace(temp_name, path)
    except (OSError, ValueError) as e:
        if temp_name is not None and os.path.exists(temp_name):
            os.unlink(temp_name)
        raise EncodeError(f"Cannot write image {path}", cause=e, image_path=str(path)) from e

    logger.debug("image_saved", path=str(path), format=image_format, size=image.size)
    return path
