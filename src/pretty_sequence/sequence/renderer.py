from __future__ import annotations

from .. import svg
from ..theme import DiagramColors, DEFAULTS
from ..styles import (
    PART_SIZE,
    SLOT_WIDTH,
    LINE_HEIGHT,
    SELF_LOOP_WIDTH,
    SELF_MESSAGE_EXTRA,
    ARROW_HEAD,
    BOX_RADIUS,
    GRADIENT_ID,
    NOTCH,
    ELSE_LABEL_X,
    ELSE_LABEL_Y,
    text_block_height,
)

# ============================================================================
# Sequence diagram SVG renderer
#
# Draws the individual pieces of a diagram at coordinates chosen by the
# container layout. Every piece is wrapped in a translate group so its
# internals are expressed relative to its own origin.
#
# Pieces:
#   - participant: lifeline with a labelled header box at both ends
#   - labelled box: participant header or state note
#   - block frame: bordered rectangle with a label notch (loop/opt/alt)
#   - arrow: message line with arrowhead(s) and stacked label lines
#   - else separator: dashed line with a bracketed condition
# ============================================================================


def render_participant(
    x: float,
    y: float,
    height: float,
    lines: list[str],
    colors: DiagramColors = DEFAULTS,
) -> str:
    """Render a lifeline from the header box down to a mirrored bottom box."""
    mid = PART_SIZE / 2
    return svg.translate(x, y, [
        svg.line(mid, text_block_height(lines), mid, height, colors),
        render_labelled_box(0, 0, lines, colors, gradient=True),
        render_labelled_box(0, height, lines, colors, gradient=True),
    ])


def render_labelled_box(
    x: float,
    y: float,
    lines: list[str],
    colors: DiagramColors = DEFAULTS,
    gradient: bool = False,
) -> str:
    """Render a rounded box one slot wide with centered text lines."""
    fill = f"url(#{GRADIENT_ID})" if gradient else colors.fill
    children = [
        svg.stroke_rect(
            0, 0, PART_SIZE, text_block_height(lines), fill, colors, ry=BOX_RADIUS
        )
    ]
    for i, content in enumerate(lines):
        children.append(
            svg.centered_text(PART_SIZE / 2, i * LINE_HEIGHT + LINE_HEIGHT, content, colors)
        )
    return svg.translate(x, y, children)


def render_block_frame(
    x: float,
    y: float,
    width: float,
    height: float,
    keyword: str,
    comment: str,
    colors: DiagramColors = DEFAULTS,
) -> str:
    """Render a block border with its keyword in a bevelled top-left notch.

    The comment (iteration count or condition) is drawn in brackets next
    to the notch, and omitted when empty.
    """
    notch_w = NOTCH["width"]
    notch_h = NOTCH["height"]
    bevel = NOTCH["bevel"]
    children = [
        svg.rect(0, 0, notch_w, notch_h, colors.fill),
        svg.stroke_rect(0, 0, width, height, "none", colors),
        svg.line(0, notch_h, notch_w - bevel, notch_h, colors),
        svg.line(notch_w - bevel, notch_h, notch_w, notch_h - bevel, colors),
        svg.line(notch_w, notch_h - bevel, notch_w, 0, colors),
        svg.centered_text(NOTCH["label_x"], NOTCH["label_y"], keyword, colors),
    ]
    if comment:
        children.append(
            svg.text(NOTCH["comment_x"], NOTCH["label_y"], f"[{comment}]", colors)
        )
    return svg.translate(x, y, children)


def render_else(
    left: float,
    y: float,
    width: float,
    condition: str,
    colors: DiagramColors = DEFAULTS,
) -> str:
    """Render an alternative-branch separator across an alt block."""
    return "".join([
        svg.line(left, y, width - left, y, colors, dotted=True),
        svg.text(left + ELSE_LABEL_X, y + ELSE_LABEL_Y, f"[{condition}]", colors),
    ])


def render_arrowhead(
    x: float,
    y: float,
    pointing_right: bool,
    is_open: bool,
    colors: DiagramColors = DEFAULTS,
) -> str:
    """Render a triangular arrowhead whose tip sits at (x, y)."""
    back = -ARROW_HEAD["length"] if pointing_right else ARROW_HEAD["length"]
    half = ARROW_HEAD["half_width"]
    fill = colors.fill if is_open else colors.arrow_fill
    return svg.translate(x, y, [
        svg.triangle([(back, -half), (0, 0), (back, half)], fill, colors),
    ])


def render_arrow(
    x: float,
    y: float,
    span: int,
    lines: list[str],
    pointing_right: bool,
    dotted: bool = False,
    to_self: bool = False,
    double: bool = False,
    is_open: bool = False,
    colors: DiagramColors = DEFAULTS,
) -> str:
    """Render a message arrow.

    span is the number of slots between source and target lifelines. The
    arrow line sits under the last label line; labels are centered over
    the span.
    """
    line_y = 7 + (len(lines) - 1) * LINE_HEIGHT
    length = SLOT_WIDTH * span
    children: list[str] = []

    if to_self:
        # Fixed shape: out to the right, down, and back with a closed head
        loop_w = SELF_LOOP_WIDTH
        bottom = line_y + SELF_MESSAGE_EXTRA
        children.append(svg.line(0, line_y, loop_w, line_y, colors, dotted))
        children.append(svg.line(loop_w, line_y, loop_w, bottom, colors, dotted))
        children.append(svg.line(loop_w, bottom, 0, bottom, colors, dotted))
        children.append(render_arrowhead(0, bottom, False, False, colors))
    else:
        children.append(svg.line(0, line_y, length, line_y, colors, dotted))
        if double:
            children.append(render_arrowhead(length, line_y, True, is_open, colors))
            children.append(render_arrowhead(0, line_y, False, is_open, colors))
        else:
            tip = length if pointing_right else 0
            children.append(render_arrowhead(tip, line_y, pointing_right, is_open, colors))

    for i, content in enumerate(lines):
        children.append(svg.centered_text(length / 2, i * LINE_HEIGHT, content, colors))

    return svg.translate(x, y, children)
