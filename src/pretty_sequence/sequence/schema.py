from __future__ import annotations

import logging

from .. import svg
from ..theme import DiagramColors, DEFAULTS
from ..types import DiagramError
from ..styles import SLOT_WIDTH, INTER_PART, MARGIN, PLACEHOLDER, split_label
from .types import Participant, Signal, State, Else
from .containers import Container, AltContainer, Child
from .parser import RULES, Rule, match_line

logger = logging.getLogger(__name__)


class Schema:
    """Owns the participants and the container tree of one diagram.

    Lines are fed in order with parse_lines(); the active container moves
    down when a block opens and back to its parent when the block closes.
    Once parsing is done, render() lays out and serializes the whole tree.
    """

    def __init__(self, rules: tuple[Rule, ...] = RULES) -> None:
        self.rules = rules
        # Insertion order is first-seen order, which fixes the slot indices
        self.participants: dict[str, Participant] = {}
        self.root = Container()
        self.current: Container = self.root
        # Next autonumber value, None while numbering is off
        self.autonumber: int | None = None

    # ------------------------------------------------------------------
    # Mutations used by the grammar actions
    # ------------------------------------------------------------------

    def participant(self, name: str, label: str | None = None) -> Participant:
        """Return the participant called name, registering it on first use."""
        found = self.participants.get(name)
        if found is None:
            found = Participant.create(name, label)
            self.participants[name] = found
        return found

    def add(self, child: Child) -> None:
        self.current.add(child)

    def add_signal(
        self,
        source: str,
        target: str,
        text: str,
        dotted: bool = False,
        double: bool = False,
        open: bool = False,
    ) -> Signal:
        src = self.participant(source)
        dst = self.participant(target)
        signal = Signal(
            source=src,
            target=dst,
            text=self._number(split_label(text)),
            dotted=dotted,
            double=double,
            open=open,
        )
        self.add(signal)
        return signal

    def add_state(self, name: str, text: str) -> State:
        state = State(participant=self.participant(name), text=split_label(text))
        self.add(state)
        return state

    def add_else(self, condition: str) -> Else:
        if not isinstance(self.current, AltContainer):
            raise TypeError("else markers belong to an alt block")
        marker = Else(condition=condition, owner=self.current)
        self.add(marker)
        return marker

    def open_block(self, container: Container) -> None:
        self.add(container)
        self.current = container

    def close_block(self) -> None:
        if self.current.parent is None:
            raise ValueError("cannot close the root container")
        self.current = self.current.parent

    def _number(self, lines: list[str]) -> list[str]:
        if self.autonumber is None:
            return lines
        lines[0] = f"[{self.autonumber}] {lines[0]}"
        self.autonumber += 1
        return lines

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_line(self, line: str, number: int) -> DiagramError | None:
        outcome = match_line(self, line, self.rules)
        if outcome is None:
            return None
        kind = "scope" if outcome == "mismatch" else "syntax"
        logger.debug("line %d not understood (%s): %r", number, kind, line)
        return DiagramError.at_line(number, kind)

    def parse_lines(self, text: str) -> list[DiagramError]:
        """Parse every line, collecting errors instead of stopping at them."""
        errors: list[DiagramError] = []
        # Only "\n" ends a statement; other Unicode breaks stay inside labels
        for number, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            error = self.parse_line(line, number)
            if error is not None:
                errors.append(error)
        if self.current is not self.root:
            logger.debug("input ended inside a block at depth %d", self.current.depth)
            errors.append(DiagramError.unterminated())
        return errors

    # ------------------------------------------------------------------
    # Layout and serialization
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return max(len(self.participants) * SLOT_WIDTH - INTER_PART + MARGIN * 2, 0)

    @property
    def header_height(self) -> int:
        """Tallest participant header; every lifeline starts below it."""
        return max((p.header_height for p in self.participants.values()), default=0)

    def render(self, colors: DiagramColors = DEFAULTS, font: str | None = None) -> str:
        """Serialize the diagram, or return the placeholder if nothing is drawn."""
        header = self.header_height
        lifeline_height = header + self.root.height()
        width = self.width

        parts: list[str] = []
        for position, participant in enumerate(self.participants.values()):
            participant.position = position
            parts.append(participant.render(lifeline_height, colors))
        parts.append(self.root.render(header, width, colors))

        body = "".join(parts)
        if not body:
            return PLACEHOLDER

        height = lifeline_height + header + MARGIN * 2
        logger.debug(
            "rendered %d participants on a %dx%d canvas",
            len(self.participants), width, height,
        )
        return svg.document(width, height, svg.gradient_def(colors), body, font)
