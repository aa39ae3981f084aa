"""Image file boundary: decoding, resizing and encoding."""

from .image_io import load_image, output_format, resize_to_fill, save_image, to_pixel_array

__all__ = ["load_image", "output_format", "resize_to_fill", "save_image", "to_pixel_array"]
