"""Background substitution keyed on the dominant hue."""

from .compositor import composite, key_mask, to_rgba

__all__ = ["composite", "key_mask", "to_rgba"]
