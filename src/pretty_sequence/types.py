from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# ============================================================================
# Compile errors -- collected per line, never raised by the parser
# ============================================================================

ErrorKind = Literal["syntax", "scope", "unterminated"]

UNTERMINATED_MESSAGE = "E: missing closing 'end' tag before the end of the code"


@dataclass(slots=True, frozen=True)
class DiagramError:
    # 1-based line number, None for errors about the whole document
    line: int | None
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def at_line(cls, line: int, kind: ErrorKind = "syntax") -> DiagramError:
        return cls(line=line, kind=kind, message=f"E: line {line}")

    @classmethod
    def unterminated(cls) -> DiagramError:
        return cls(line=None, kind="unterminated", message=UNTERMINATED_MESSAGE)


class DiagramCompileError(ValueError):
    """Raised by CompileResult.raise_for_errors() when a compile reported errors."""

    def __init__(self, errors: list[DiagramError], separator: str = "\n") -> None:
        self.errors = list(errors)
        super().__init__(separator.join(str(e) for e in self.errors))


@dataclass(slots=True)
class CompileResult:
    """Outcome of compiling diagram text: the error list and the SVG document."""
    errors: list[DiagramError] = field(default_factory=list)
    # SVG markup, or the placeholder message when nothing was drawn
    document: str = ""
    separator: str = "\n"

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def report(self) -> str:
        return self.separator.join(str(e) for e in self.errors)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise DiagramCompileError(self.errors, self.separator)


# ============================================================================
# Render options -- user-facing configuration
# ============================================================================

@dataclass(slots=True)
class RenderOptions:
    theme: str | None = None
    stroke: str | None = None
    fill: str | None = None
    arrow_fill: str | None = None
    gradient_top: str | None = None
    gradient_bottom: str | None = None
    font: str | None = None
    error_separator: str | None = None
