"""pretty-sequence -- Compile a line-oriented sequence diagram description to SVG."""

from __future__ import annotations

import logging

from .types import RenderOptions, CompileResult, DiagramError, DiagramCompileError
from .theme import DiagramColors, THEMES, DEFAULTS, resolve_colors
from .sequence.schema import Schema

logger = logging.getLogger(__name__)

__all__ = [
    "compile_diagram",
    "render_diagram",
    "RenderOptions",
    "CompileResult",
    "DiagramError",
    "DiagramCompileError",
    "DiagramColors",
    "THEMES",
    "DEFAULTS",
]


def _build_colors(options: RenderOptions) -> DiagramColors:
    """Build DiagramColors from render options."""
    return resolve_colors(
        options.theme,
        stroke=options.stroke,
        fill=options.fill,
        arrow_fill=options.arrow_fill,
        gradient_top=options.gradient_top,
        gradient_bottom=options.gradient_bottom,
    )


def compile_diagram(
    text: str,
    options: RenderOptions | None = None,
) -> CompileResult:
    """Compile diagram text into an SVG document plus a per-line error report.

    Parsing never stops at a bad line: unrecognized statements, mismatched
    block terminators and unterminated blocks are collected, and whatever
    structure was built is still rendered.
    """
    if options is None:
        options = RenderOptions()

    colors = _build_colors(options)
    separator = options.error_separator if options.error_separator is not None else "\n"

    schema = Schema()
    errors = schema.parse_lines(text)
    document = schema.render(colors, options.font)

    if errors:
        logger.debug("compiled with %d error(s)", len(errors))
    return CompileResult(errors=errors, document=document, separator=separator)


def render_diagram(
    text: str,
    options: RenderOptions | None = None,
) -> str:
    """Render diagram text to an SVG string, ignoring reported errors."""
    return compile_diagram(text, options).document
