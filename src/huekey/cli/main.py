"""huekey CLI - Main entry point.

Replaces the dominant-hue background of an image with another image.

Exit codes:
    0: Success
    2: Missing or invalid arguments
    3: Input or background image could not be decoded
    4: Dominant hue could not be estimated
    5: Output image could not be written
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .. import __version__
from ..config import get_settings
from ..exceptions import DecodeError, EncodeError, EstimationError, HueKeyError, InputError
from ..logging import SpanProfiler, setup_logging
from ..pipeline import ReplaceJob, replace_background
from .formatters import format_profile

# Exit codes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_DECODE_ERROR = 3
EXIT_ESTIMATION_ERROR = 4
EXIT_ENCODE_ERROR = 5

_EXIT_CODES: dict[type[HueKeyError], int] = {
    InputError: EXIT_INPUT_ERROR,
    DecodeError: EXIT_DECODE_ERROR,
    EstimationError: EXIT_ESTIMATION_ERROR,
    EncodeError: EXIT_ENCODE_ERROR,
}


def exit_code_for(error: HueKeyError) -> int:
    """Map an error to the process exit status."""
    for error_type, code in _EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


@click.command()
@click.version_option(version=__version__, prog_name="huekey")
@click.option("--input", "-i", "input_path", type=click.Path(dir_okay=False), help="Input image")
@click.option(
    "--output", "-o", "output_path", type=click.Path(dir_okay=False), help="Output image"
)
@click.option(
    "--background",
    "-b",
    "background_path",
    type=click.Path(dir_okay=False),
    help="Background image to display",
)
@click.option(
    "--percentile",
    "-p",
    type=float,
    default=None,
    help="Histogram percentile used as the key hue [default: 30]",
)
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(["percentile", "mode"]),
    default=None,
    help="Reduce the hue histogram by percentile (tolerance = stddev) or mode",
)
@click.option(
    "--tolerance",
    "-t",
    type=float,
    default=None,
    help="Fixed hue tolerance in degrees for the mode strategy [default: 20]",
)
@click.option(
    "--flame-html",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a flame chart of the run to an HTML file",
)
@click.option("--profile", is_flag=True, help="Print profiling information to stdout")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(
    input_path: str | None,
    output_path: str | None,
    background_path: str | None,
    percentile: float | None,
    strategy: str | None,
    tolerance: float | None,
    flame_html: str | None,
    profile: bool,
    verbose: bool,
) -> None:
    """Replace the dominant-hue background of an image.

    The key hue is inferred from the input image itself; every pixel close to
    it is replaced by the pixel at the same position of the background image.
    """
    profiler = SpanProfiler(enabled=profile or flame_html is not None)

    try:
        with profiler.span("arg_parse"):
            settings = get_settings()
            setup_logging(
                level="DEBUG" if verbose else settings.log_level,
                structured=settings.structured_logs,
            )
            try:
                config = settings.to_estimation_config(strategy, percentile, tolerance)
            except ValueError as e:
                raise InputError(str(e)) from e
            job = ReplaceJob.from_arguments(input_path, background_path, output_path, config)

        color = replace_background(job, profiler=profiler)
    except ValidationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(EXIT_INPUT_ERROR)
    except HueKeyError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exit_code_for(e))

    click.echo(f"Using hue: {color.hue} (dev {color.tolerance})")

    if flame_html:
        try:
            Path(flame_html).write_text(format_profile(profiler, "html"), encoding="utf-8")
        except OSError as e:
            click.echo(f"Error: Cannot write flame chart {flame_html}: {e}", err=True)
            sys.exit(EXIT_ENCODE_ERROR)

    if profile:
        click.echo(format_profile(profiler, "text"))

    sys.exit(EXIT_SUCCESS)
