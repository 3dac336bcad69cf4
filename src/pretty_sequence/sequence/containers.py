from __future__ import annotations

from typing import Literal, Union

from ..theme import DiagramColors, DEFAULTS
from ..styles import BLOCK_HEADER, BLOCK_BODY_OFFSET, BLOCK_INSET, BLOCK_MARGIN
from .renderer import render_block_frame
from .types import Signal, State, Else

# ============================================================================
# Container hierarchy -- the layout core
#
# A diagram body is a tree of containers. Each variant combines the heights
# of its children differently:
#
#   Container          sequential: children stacked top to bottom
#   ParallelContainer  children start together, bottom-aligned
#   LoopContainer      sequential body under a framed header (loop/opt)
#   AltContainer       like LoopContainer, with a condition and else markers
#
# height() runs bottom-up and is cached until the next child is added;
# render() runs top-down and hands every child its own y offset.
# ============================================================================

BlockKeyword = Literal["loop", "opt", "alt"]


class Container:
    """Sequential scope. The root of every diagram is one of these."""

    # Height reserved by the container itself, before any child
    base_height = 0

    def __init__(self, parent: Container | None = None) -> None:
        self.children: list[Child] = []
        # Non-owning: used for depth and to restore scope on block close
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self._height: int | None = None

    def add(self, child: Child) -> None:
        self.children.append(child)
        # A new child changes this height and every enclosing one
        scope: Container | None = self
        while scope is not None:
            scope._height = None
            scope = scope.parent

    def height(self) -> int:
        if self._height is None:
            self._height = self._compute_height()
        return self._height

    def _compute_height(self) -> int:
        return self.base_height + sum(child.height() for child in self.children)

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        return self._render_sequence(y, width, colors)

    def _render_sequence(self, y: float, width: float, colors: DiagramColors) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.render(y, width, colors))
            y += child.height()
        return "".join(parts)


class ParallelContainer(Container):
    """Children start at the same time; the tallest one sets the height."""

    def _compute_height(self) -> int:
        return max((child.height() for child in self.children), default=0)

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        own = self.height()
        return "".join(
            child.render(y + own - child.height(), width, colors)
            for child in self.children
        )


class LoopContainer(Container):
    """Framed sequential block: ``loop <label>`` or ``opt``."""

    base_height = BLOCK_HEADER

    def __init__(
        self,
        parent: Container | None,
        keyword: BlockKeyword,
        label: str = "",
    ) -> None:
        super().__init__(parent)
        self.keyword = keyword
        self.label = label

    @property
    def comment(self) -> str:
        """Text shown in brackets next to the keyword notch."""
        return self.label

    def render(self, y: float, width: float, colors: DiagramColors = DEFAULTS) -> str:
        inset = BLOCK_INSET * (self.depth + 1)
        frame = render_block_frame(
            inset,
            y,
            max(width - inset * 2, 0),
            self.height() - BLOCK_MARGIN,
            self.keyword,
            self.comment,
            colors,
        )
        return frame + self._render_sequence(y + BLOCK_BODY_OFFSET, width, colors)


class AltContainer(LoopContainer):
    """Framed block with a free-text condition; may hold Else markers."""

    def __init__(self, parent: Container | None, condition: str) -> None:
        super().__init__(parent, "alt")
        self.condition = condition

    @property
    def comment(self) -> str:
        return self.condition


Child = Union[Signal, State, Else, Container]
