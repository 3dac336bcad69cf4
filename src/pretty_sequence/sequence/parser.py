from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Literal, Optional

from .containers import ParallelContainer, LoopContainer, AltContainer

if TYPE_CHECKING:
    from .schema import Schema

logger = logging.getLogger(__name__)

# ============================================================================
# Sequence diagram grammar
#
# One statement per line. Every line is tried against an ordered list of
# rules; the first rule whose pattern matches with the declared number of
# captured fields runs its action against the schema. Several patterns
# overlap on purpose (the aliased participant form also matches the bare
# form, almost anything matches the arrow form), so the order below is
# part of the grammar.
#
# Supported syntax:
#   participant "Name"
#   participant "Long Name" as A
#   parallel {  ...  }
#   opt  ...  end
#   loop Label  ...  end
#   alt Condition  ...  else Condition  ...  end
#   autonumber 1 / autonumber off
#   state over A: Text
#   A->B: Solid       A-->B: Dotted       A->>B: Open arrowhead
#   A<->B: Double     A<-->>B: Dotted, double, open
#   # comment
#
# Labels may contain the literal two-character escape \n for line breaks.
# ============================================================================

# An action either applies the line (returns None), rejects it because the
# active scope does not allow it ("mismatch"), or declines it so that later
# rules get a chance ("skip").
RuleOutcome = Literal["mismatch", "skip"]
Fields = tuple[Optional[str], ...]
Action = Callable[["Schema", Fields], Optional[RuleOutcome]]


@dataclass(slots=True, frozen=True)
class Rule:
    name: str
    pattern: re.Pattern[str]
    # Number of capture groups the pattern must yield
    arity: int
    action: Action

    def match(self, line: str) -> Fields | None:
        m = self.pattern.match(line)
        if m is None or len(m.groups()) != self.arity:
            return None
        return m.groups()


# ============================================================================
# Actions
# ============================================================================


def _declare_aliased(schema: Schema, fields: Fields) -> None:
    label, name = fields
    schema.participant(name or "", label or "")


def _declare(schema: Schema, fields: Fields) -> None:
    schema.participant(fields[0] or "")


def _open_parallel(schema: Schema, fields: Fields) -> None:
    schema.open_block(ParallelContainer(schema.current))


def _close_parallel(schema: Schema, fields: Fields) -> RuleOutcome | None:
    if not isinstance(schema.current, ParallelContainer):
        return "mismatch"
    schema.close_block()
    return None


def _open_opt(schema: Schema, fields: Fields) -> None:
    schema.open_block(LoopContainer(schema.current, "opt"))


def _open_loop(schema: Schema, fields: Fields) -> None:
    schema.open_block(LoopContainer(schema.current, "loop", fields[0] or ""))


def _open_alt(schema: Schema, fields: Fields) -> None:
    schema.open_block(AltContainer(schema.current, fields[0] or ""))


def _else(schema: Schema, fields: Fields) -> RuleOutcome | None:
    if not isinstance(schema.current, AltContainer):
        return "skip"
    schema.add_else(fields[0] or "")
    return None


def _end(schema: Schema, fields: Fields) -> RuleOutcome | None:
    # AltContainer is a LoopContainer, so one check covers loop/opt/alt
    if not isinstance(schema.current, LoopContainer):
        return "mismatch"
    schema.close_block()
    return None


def _autonumber(schema: Schema, fields: Fields) -> None:
    schema.autonumber = int(fields[0] or "0")


def _autonumber_off(schema: Schema, fields: Fields) -> None:
    schema.autonumber = None


def _state(schema: Schema, fields: Fields) -> None:
    name, text = fields
    schema.add_state(name or "", text or "")


def _signal(schema: Schema, fields: Fields) -> None:
    source, reverse, dotted, open_head, target, text = fields
    schema.add_signal(
        source or "",
        target or "",
        text or "",
        dotted=dotted == "-",
        double=reverse == "<",
        open=open_head == ">",
    )


def _ignore(schema: Schema, fields: Fields) -> None:
    return None


def _rule(name: str, pattern: str, arity: int, action: Action) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern), arity=arity, action=action)


RULES: tuple[Rule, ...] = (
    _rule("participant_alias", r'^[ \t]*participant(?:[ ]+|(?="))"([^"]*)"[ ]*as[ ]*"?([^"]*)"?$', 2, _declare_aliased),
    _rule("participant", r'^[ \t]*participant(?:[ ]+|(?="))"?([^"]*)"?$', 1, _declare),
    _rule("parallel_open", r"^[ \t]*parallel[ ]*\{[ ]*$", 0, _open_parallel),
    _rule("parallel_close", r"^[ \t]*\}[ ]*$", 0, _close_parallel),
    _rule("opt", r"^[ \t]*opt[ ]*$", 0, _open_opt),
    _rule("loop", r"^[ \t]*loop[ ]+(.+?)[ ]*$", 1, _open_loop),
    _rule("alt", r"^[ \t]*alt[ ]+(.+?)[ ]*$", 1, _open_alt),
    _rule("else", r"^[ \t]*else[ ]+(.+?)[ ]*$", 1, _else),
    _rule("end", r"^[ \t]*end[ ]*$", 0, _end),
    _rule("autonumber", r"^[ \t]*autonumber[ ]*([0-9]+)[ ]*$", 1, _autonumber),
    _rule("autonumber_off", r"^[ \t]*autonumber[ ]*off[ ]*$", 0, _autonumber_off),
    _rule("state", r"^[ \t]*state[ ]*over[ ]*([^: ]*)[ ]*:[ ]*(.*)$", 2, _state),
    _rule("signal", r"^[ \t]*([^- <]*)[ ]*(<)?(-)?->(>)?[ ]*([^: ]*)[ ]*:[ ]*(.*)$", 6, _signal),
    _rule("comment", r"^#.*$", 0, _ignore),
    _rule("blank", r"^[ \t]*$", 0, _ignore),
)


def match_line(
    schema: Schema,
    line: str,
    rules: tuple[Rule, ...] = RULES,
) -> RuleOutcome | None:
    """Apply the first rule that accepts the line.

    Returns None when a rule applied the line, "mismatch" when the only
    rules that matched were rejected by the active scope, and "skip" when
    no rule matched at all.
    """
    outcome: RuleOutcome = "skip"
    for rule in rules:
        fields = rule.match(line)
        if fields is None:
            continue
        result = rule.action(schema, fields)
        if result is None:
            return None
        if result == "mismatch":
            logger.debug("rule %s rejected %r in the current scope", rule.name, line)
            outcome = "mismatch"
    return outcome
