"""Profile report formatters for CLI output.

- text: indented span tree with durations, for ``--profile``
- html: standalone flame chart, for ``--flame-html``
"""

import html

from ..logging import Span, SpanProfiler

_FLAME_COLORS = ("#e4572e", "#f3a712", "#a8c686", "#669bbc", "#29335c")


def format_profile(profiler: SpanProfiler, format_type: str) -> str:
    """Format recorded spans in the specified format.

    Args:
        profiler: Profiler holding the recorded spans
        format_type: Output format ("text" or "html")

    Returns:
        Formatted string output

    Raises:
        ValueError: If format_type is not recognized
    """
    if format_type == "text":
        return _format_text(profiler)
    elif format_type == "html":
        return _format_html(profiler)
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def _format_text(profiler: SpanProfiler) -> str:
    lines = []
    for span in profiler.walk():
        indent = "  " * span.depth
        lines.append(f"{indent}{span.name}: {span.duration * 1000:.3f}ms")
    return "\n".join(lines)


def _format_html(profiler: SpanProfiler) -> str:
    """Render spans as absolutely positioned bars, one row per nesting depth."""
    spans = list(profiler.walk())
    total = max((span.end for span in spans), default=0.0) or 1.0
    row_height = 24
    rows = max((span.depth for span in spans), default=0) + 1

    bars = [_format_bar(span, total, row_height) for span in spans]

    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            "<title>huekey profile</title>",
            "<style>",
            "body { font-family: sans-serif; }",
            f".chart {{ position: relative; height: {rows * row_height}px; }}",
            ".span { position: absolute; height: 22px; overflow: hidden; white-space: nowrap;"
            " font-size: 12px; line-height: 22px; padding-left: 2px; box-sizing: border-box;"
            " border: 1px solid #fff; }",
            "</style>",
            "</head>",
            "<body>",
            f"<h1>huekey profile ({total * 1000:.3f}ms)</h1>",
            '<div class="chart">',
            *bars,
            "</div>",
            "</body>",
            "</html>",
        ]
    )


def _format_bar(span: Span, total: float, row_height: int) -> str:
    left = span.start / total * 100
    width = span.duration / total * 100
    color = _FLAME_COLORS[span.depth % len(_FLAME_COLORS)]
    label = html.escape(f"{span.name} ({span.duration * 1000:.3f}ms)")
    return (
        f'<div class="span" title="{label}" style="left: {left:.4f}%; width: {width:.4f}%; '
        f'top: {span.depth * row_height}px; background: {color};">{label}</div>'
    )
