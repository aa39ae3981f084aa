"""huekey Command Line Interface.

Usage:
    python -m huekey -i input.png -b background.jpg -o output.png

Or via the installed entry point:
    huekey --help
"""

from .main import main

__all__ = ["main"]
