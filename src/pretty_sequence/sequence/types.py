from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..theme import DiagramColors, DEFAULTS
from ..styles import (
    SLOT_WIDTH,
    PART_SIZE,
    MARGIN,
    BOX_PADDING,
    HEADER_GAP,
    LINE_HEIGHT,
    SELF_MESSAGE_EXTRA,
    STATE_PADDING,
    ELSE_HEIGHT,
    BLOCK_INSET,
    split_label,
)
from .renderer import (
    render_participant,
    render_labelled_box,
    render_arrow,
    render_else,
)

if TYPE_CHECKING:
    from .containers import AltContainer

# ============================================================================
# Sequence diagram entities
#
# Value objects placed in the container tree. Each knows its own height and
# how to draw itself at a vertical offset; horizontal placement comes from
# the participant slot indices assigned just before rendering.
# ============================================================================


def slot_x(position: int) -> float:
    """Left edge of a participant slot."""
    return position * SLOT_WIDTH + MARGIN


@dataclass(slots=True, eq=False)
class Participant:
    # Unique key inside a schema
    name: str
    # Display label, one entry per text line
    text: list[str]
    # Horizontal slot, assigned by first-seen order at render time
    position: int = 0

    @classmethod
    def create(cls, name: str, label: str | None = None) -> Participant:
        """Build a participant; the label defaults to the name."""
        return cls(name=name, text=split_label(name if label is None else label))

    @property
    def header_height(self) -> int:
        """Header box plus the gap reserved before the first message."""
        return len(self.text) * LINE_HEIGHT + BOX_PADDING + HEADER_GAP

    def render(self, lifeline_height: float, colors: DiagramColors = DEFAULTS) -> str:
        return render_participant(
            slot_x(self.position), MARGIN, lifeline_height, self.text, colors
        )


@dataclass(slots=True, frozen=True)
class Signal:
    """A message arrow between two participants."""
    source: Participant
    target: Participant
    text: list[str]
    dotted: bool = False
    double: bool = False
    open: bool = False

    @property
    def is_self(self) -> bool:
        return self.source.name == self.target.name

    def height(self) -> int:
        base = len(self.text) * LINE_HEIGHT + BOX_PADDING
        return base + SELF_MESSAGE_EXTRA if self.is_self else base

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        left = min(self.source.position, self.target.position)
        return render_arrow(
            slot_x(left) + PART_SIZE / 2,
            y + BOX_PADDING,
            abs(self.source.position - self.target.position),
            self.text,
            pointing_right=left == self.source.position,
            dotted=self.dotted,
            to_self=self.is_self,
            double=self.double,
            is_open=self.open,
            colors=colors,
        )


@dataclass(slots=True, frozen=True)
class State:
    """A note drawn over a single participant's lifeline."""
    participant: Participant
    text: list[str]

    def height(self) -> int:
        return len(self.text) * LINE_HEIGHT + STATE_PADDING

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        return render_labelled_box(slot_x(self.participant.position), y, self.text, colors)


@dataclass(slots=True, eq=False)
class Else:
    """Separator between two branches of an alt block.

    owner is the alt block the separator was declared in; the separator has
    no depth of its own and is indented like its owner's frame.
    """
    condition: str
    owner: AltContainer = field(repr=False)

    def height(self) -> int:
        return ELSE_HEIGHT

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        left = BLOCK_INSET * (self.owner.depth + 1)
        return render_else(left, y, width, self.condition, colors)


