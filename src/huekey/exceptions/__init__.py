"""Exceptions package.

Error kinds raised by the huekey pipeline.
"""

from .decode_error import DecodeError
from .encode_error import EncodeError
from .estimation_error import EstimationError
from .huekey_error import HueKeyError
from .input_error import InputError

__all__ = [
    "HueKeyError",
    "InputError",
    "DecodeError",
    "EstimationError",
    "EncodeError",
]
