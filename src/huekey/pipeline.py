"""Background replacement pipeline.

Runs decode -> resize -> estimate -> composite -> encode for one image. Each
run is independent; nothing is carried over between invocations.
"""

from dataclasses import dataclass, field
from pathlib import Path

from .compositing import composite
from .estimation import DominantColor, EstimationConfig, estimate_dominant_color
from .exceptions import InputError
from .io import load_image, resize_to_fill, save_image, to_pixel_array
from .logging import SpanProfiler, get_logger

logger = get_logger(__name__)


@dataclass
class ReplaceJob:
    """Paths and estimation parameters for one replacement run."""

    input_path: Path
    background_path: Path
    output_path: Path
    config: EstimationConfig = field(default_factory=EstimationConfig)

    @classmethod
    def from_arguments(
        cls,
        input_path: str | Path | None,
        background_path: str | Path | None,
        output_path: str | Path | None,
        config: EstimationConfig | None = None,
    ) -> "ReplaceJob":
        """Validate raw arguments and build a job.

        Raises:
            InputError: If any required path is missing
        """
        for argument, value in (
            ("input", input_path),
            ("background", background_path),
            ("output", output_path),
        ):
            if not value:
                raise InputError(f"Missing required --{argument} path", argument=argument)

        return cls(
            input_path=Path(input_path),  # type: ignore[arg-type]
            background_path=Path(background_path),  # type: ignore[arg-type]
            output_path=Path(output_path),  # type: ignore[arg-type]
            config=config or EstimationConfig(),
        )


def replace_background(job: ReplaceJob, profiler: SpanProfiler | None = None) -> DominantColor:
    """Replace the dominant-hue background of ``job.input_path``.

    Args:
        job: Paths and estimation parameters
        profiler: Optional profiler receiving one span per stage

    Returns:
        The dominant color that was keyed out

    Raises:
        DecodeError: If the input or background cannot be read
        EstimationError: If the input has no pixels
        EncodeError: If the output cannot be written
    """
    profiler = profiler or SpanProfiler(enabled=False)

    with profiler.span("load_input"):
        source_image = load_image(job.input_path)
    with profiler.span("load_bg"):
        background_image = load_image(job.background_path)

    with profiler.span("resize_bg"):
        background_image = resize_to_fill(background_image, source_image.size)

    source = to_pixel_array(source_image)
    background = to_pixel_array(background_image)

    color = estimate_dominant_color(source, job.config, profiler=profiler)
    logger.info("using_hue", hue=color.hue, tolerance=color.tolerance)

    output = composite(source, color, background, profiler=profiler)

    with profiler.span("save"):
        save_image(output, job.output_path)

    logger.info("background_replaced", output=str(job.output_path))
    return color
