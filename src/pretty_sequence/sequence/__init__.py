from __future__ import annotations

from .types import Participant, Signal, State, Else
from .containers import Container, ParallelContainer, LoopContainer, AltContainer
from .parser import Rule, RULES, match_line
from .schema import Schema

__all__ = [
    "Participant",
    "Signal",
    "State",
    "Else",
    "Container",
    "ParallelContainer",
    "LoopContainer",
    "AltContainer",
    "Rule",
    "RULES",
    "match_line",
    "Schema",
]
