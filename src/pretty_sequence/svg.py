from __future__ import annotations

from .theme import DiagramColors, DEFAULTS
from .styles import STROKE_WIDTHS, DASH_ARRAY, GRADIENT_ID

# ============================================================================
# SVG primitives
#
# One builder per shape in the fixed vocabulary. Builders only format
# markup: callers supply coordinates, and any user text goes through
# escape_xml() before it reaches the document.
# ============================================================================


def escape_xml(text: str) -> str:
    """Escape special XML characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _text_style(colors: DiagramColors, anchor: str | None = None) -> str:
    rules = []
    if anchor:
        rules.append(f"text-anchor:{anchor}")
    if colors.text:
        rules.append(f"fill:{escape_xml(colors.text)}")
    return f' style="{";".join(rules)}"' if rules else ""


def text(x: float, y: float, content: str, colors: DiagramColors = DEFAULTS) -> str:
    return f'<text x="{x}" y="{y}"{_text_style(colors)}>{escape_xml(content)}</text>'


def centered_text(
    x: float, y: float, content: str, colors: DiagramColors = DEFAULTS
) -> str:
    return (
        f'<text x="{x}" y="{y}"{_text_style(colors, "middle")}>'
        f"{escape_xml(content)}</text>"
    )


def rect(
    x: float, y: float, width: float, height: float, fill: str, ry: float = 0
) -> str:
    """Borderless filled rectangle."""
    return (
        f'<rect x="{x}" y="{y}" width="{width}" height="{height}" ry="{ry}" '
        f'style="fill: {escape_xml(fill)};"></rect>'
    )


def stroke_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    fill: str,
    colors: DiagramColors = DEFAULTS,
    ry: float = 0,
) -> str:
    """Rectangle with a solid border."""
    return (
        f'<rect x="{x}" y="{y}" width="{width}" height="{height}" ry="{ry}" '
        f'style="fill: {escape_xml(fill)};stroke:{escape_xml(colors.stroke)};stroke-width:{STROKE_WIDTHS["box"]};"></rect>'
    )


def line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    colors: DiagramColors = DEFAULTS,
    dotted: bool = False,
) -> str:
    dash = f' stroke-dasharray="{DASH_ARRAY}"' if dotted else ""
    return (
        f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        f'style="stroke:{escape_xml(colors.stroke)};stroke-width:{STROKE_WIDTHS["line"]}"{dash}></line>'
    )


def triangle(
    points: list[tuple[float, float]], fill: str, colors: DiagramColors = DEFAULTS
) -> str:
    coords = " ".join(f"{x},{y}" for x, y in points)
    return (
        f'<polygon points="{coords}" style="fill: {escape_xml(fill)};'
        f'stroke:{escape_xml(colors.stroke)};stroke-width:{STROKE_WIDTHS["arrow_head"]}px"></polygon>'
    )


def translate(x: float, y: float, children: list[str]) -> str:
    """Positioning group: children are drawn relative to (x, y)."""
    return f'<g transform="translate({x},{y})">{"".join(children)}</g>'


# ============================================================================
# Document pieces
# ============================================================================


def gradient_def(colors: DiagramColors, gradient_id: str = GRADIENT_ID) -> str:
    """Vertical linear gradient shared by all participant headers."""
    top = escape_xml(colors.gradient_top)
    bottom = escape_xml(colors.gradient_bottom)
    return (
        f'<linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="0%" y2="100%">'
        f'<stop offset="0%" style="stop-color:{top};stop-opacity:1"></stop>'
        f'<stop offset="100%" style="stop-color:{bottom};stop-opacity:1"></stop>'
        f"</linearGradient>"
    )


def svg_open_tag(width: float, height: float, font: str | None = None) -> str:
    """Build the SVG opening tag with explicit dimensions."""
    style = f' style="font-family:{escape_xml(font)}"' if font else ""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'width="{width}" height="{height}"{style}>'
    )


def document(
    width: float, height: float, defs: str, body: str, font: str | None = None
) -> str:
    """Top-level SVG document with a <defs> section."""
    return f"{svg_open_tag(width, height, font)}<defs>{defs}</defs>{body}</svg>"
