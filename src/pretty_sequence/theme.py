from __future__ import annotations

from dataclasses import dataclass, replace


# ============================================================================
# Types
# ============================================================================


@dataclass(slots=True)
class DiagramColors:
    """Diagram color configuration.

    stroke/fill cover lines, frames and box backgrounds. arrow_fill is used
    for closed arrowheads; open arrowheads always use fill. The two gradient
    stops shade participant headers from top to bottom.
    """

    stroke: str
    fill: str
    arrow_fill: str
    gradient_top: str
    gradient_bottom: str
    text: str | None = None


# ============================================================================
# Defaults
# ============================================================================

DEFAULTS = DiagramColors(
    stroke="black",
    fill="white",
    arrow_fill="black",
    gradient_top="rgb(200, 200, 200)",
    gradient_bottom="rgb(100,100,100)",
)

# ============================================================================
# Well-known palettes
# ============================================================================

THEMES: dict[str, DiagramColors] = {
    "classic": DEFAULTS,
    "slate": DiagramColors(
        stroke="#334155", fill="#f8fafc", arrow_fill="#334155",
        gradient_top="#e2e8f0", gradient_bottom="#94a3b8",
        text="#0f172a",
    ),
    "sepia": DiagramColors(
        stroke="#5b4636", fill="#fdf6e3", arrow_fill="#5b4636",
        gradient_top="#f4e3c1", gradient_bottom="#c8a97e",
        text="#3b2f2f",
    ),
    "github-light": DiagramColors(
        stroke="#1f2328", fill="#ffffff", arrow_fill="#0969da",
        gradient_top="#f6f8fa", gradient_bottom="#d1d9e0",
        text="#1f2328",
    ),
}


def resolve_colors(
    theme: str | None = None,
    **overrides: str | None,
) -> DiagramColors:
    """Look up a named palette and apply per-color overrides.

    Overrides set to None are ignored. Raises ValueError for unknown themes.
    """
    if theme is None:
        base = DEFAULTS
    elif theme in THEMES:
        base = THEMES[theme]
    else:
        raise ValueError(
            f"Unknown theme {theme!r}. Available themes: {', '.join(sorted(THEMES))}"
        )
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(base, **changes) if changes else base
