from __future__ import annotations

# ============================================================================
# Geometry constants -- the fixed visual vocabulary of a sequence diagram.
# All values are in SVG user units.
# ============================================================================

# Width of a participant box (and of its lifeline slot)
PART_SIZE = 125
# Horizontal gap between two participant slots
INTER_PART = 25
# Distance between the lifelines of two neighbouring participants
SLOT_WIDTH = PART_SIZE + INTER_PART

# Margin around participant boxes and the document edges
MARGIN = 5

# Vertical space taken by one line of label text
LINE_HEIGHT = 20

# Padding below the last text line of a labelled box
BOX_PADDING = 10

# Extra room reserved under participant headers before the first message
HEADER_GAP = 30

# Extra height of a message that loops back to its own participant
SELF_MESSAGE_EXTRA = 20
# Width of the loop drawn for a self-message
SELF_LOOP_WIDTH = 30

# Extra padding below a state note
STATE_PADDING = 15

# Fixed height of an else separator
ELSE_HEIGHT = 30

# Header reserved by loop/opt/alt blocks (label box + bottom margin)
BLOCK_HEADER = 60
# Offset from the top of a block frame to its first child
BLOCK_BODY_OFFSET = 50
# Inset applied on each side of a block frame, per nesting level
BLOCK_INSET = 10
# Gap left between the bottom of a block frame and whatever follows it
BLOCK_MARGIN = 10

# Label notch in the top-left corner of a block frame
NOTCH = {
    "width": 70,
    "height": 30,
    "bevel": 10,
    "label_x": 30,
    "label_y": 20,
    "comment_x": 90,
}

# Horizontal offset of an else condition label from the separator start
ELSE_LABEL_X = 90
ELSE_LABEL_Y = 20

STROKE_WIDTHS = {
    "line": 2,
    "box": 2,
    "arrow_head": 1,
}

# Dash pattern shared by dotted messages and else separators
DASH_ARRAY = "10,5"

ARROW_HEAD = {
    "length": 15,
    "half_width": 5,
}

# Corner radius of participant/state boxes
BOX_RADIUS = 5

# Shared gradient id used to fill participant headers
GRADIENT_ID = "grad1"

# Output when nothing was drawn
PLACEHOLDER = "Nothing to draw yet."


def text_block_height(lines: list[str]) -> int:
    """Height of a labelled box holding the given text lines."""
    return len(lines) * LINE_HEIGHT + BOX_PADDING


def split_label(text: str) -> list[str]:
    """Split a label on the literal two-character ``\\n`` escape."""
    return text.split("\\n")
