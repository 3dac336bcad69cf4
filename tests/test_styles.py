"""Tests for styles, theme and SVG primitive modules."""
from __future__ import annotations

import pytest

from pretty_sequence import svg
from pretty_sequence.styles import (
    PART_SIZE,
    INTER_PART,
    SLOT_WIDTH,
    split_label,
    text_block_height,
)
from pretty_sequence.theme import (
    THEMES,
    DEFAULTS,
    DiagramColors,
    resolve_colors,
)


# ============================================================================
# Geometry helpers
# ============================================================================


class TestGeometry:
    def test_slot_width_is_box_plus_gap(self):
        assert SLOT_WIDTH == PART_SIZE + INTER_PART == 150

    def test_split_label_on_literal_escape(self):
        assert split_label("a\\nb") == ["a", "b"]
        assert split_label("a\nb") == ["a\nb"]
        assert split_label("") == [""]

    def test_text_block_height(self):
        assert text_block_height(["a"]) == 30
        assert text_block_height(["a", "b", "c"]) == 70


# ============================================================================
# Theme system
# ============================================================================


class TestThemes:
    def test_contains_named_palettes(self):
        assert "classic" in THEMES
        assert "slate" in THEMES
        assert THEMES["classic"] is DEFAULTS

    def test_all_themes_are_diagram_colors(self):
        for name, colors in THEMES.items():
            assert isinstance(colors, DiagramColors), name

    def test_resolve_defaults(self):
        assert resolve_colors() is DEFAULTS

    def test_resolve_ignores_none_overrides(self):
        assert resolve_colors("slate", stroke=None) is THEMES["slate"]

    def test_resolve_applies_overrides_without_mutating_theme(self):
        colors = resolve_colors("classic", fill="ivory")
        assert colors.fill == "ivory"
        assert colors.stroke == "black"
        assert DEFAULTS.fill == "white"

    def test_resolve_unknown_theme(self):
        with pytest.raises(ValueError, match="Available themes"):
            resolve_colors("neon")

    def test_gradient_def_uses_palette_stops(self):
        colors = DiagramColors(
            stroke="k", fill="w", arrow_fill="k",
            gradient_top="#111", gradient_bottom="#222",
        )
        out = svg.gradient_def(colors)
        assert out.startswith('<linearGradient id="grad1" x1="0%" y1="0%" x2="0%" y2="100%">')
        assert "stop-color:#111" in out
        assert "stop-color:#222" in out

    def test_svg_open_tag(self):
        assert svg.svg_open_tag(10, 20) == (
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="10" height="20">'
        )

    def test_svg_open_tag_escapes_font(self):
        out = svg.svg_open_tag(1, 2, 'a"b<c')
        assert out.endswith(' style="font-family:a&quot;b&lt;c">')

    def test_gradient_def_escapes_stops(self):
        colors = resolve_colors("classic", gradient_top='x"/>')
        out = svg.gradient_def(colors)
        assert "stop-color:x&quot;/&gt;;" in out
        assert 'x"/>' not in out


# ============================================================================
# Primitives
# ============================================================================


class TestPrimitives:
    def test_escape_xml(self):
        assert svg.escape_xml('<a href="x">&\'') == "&lt;a href=&quot;x&quot;&gt;&amp;&#39;"

    def test_text_is_escaped(self):
        assert svg.text(1, 2, "<b>") == '<text x="1" y="2">&lt;b&gt;</text>'

    def test_centered_text(self):
        assert svg.centered_text(1, 2, "hi") == (
            '<text x="1" y="2" style="text-anchor:middle">hi</text>'
        )

    def test_text_color_from_palette(self):
        colors = resolve_colors(theme="sepia")
        assert 'style="text-anchor:middle;fill:#3b2f2f"' in svg.centered_text(0, 0, "x", colors)

    def test_dotted_line(self):
        out = svg.line(0, 1, 2, 3, dotted=True)
        assert out == (
            '<line x1="0" y1="1" x2="2" y2="3" style="stroke:black;stroke-width:2" '
            'stroke-dasharray="10,5"></line>'
        )

    def test_triangle(self):
        out = svg.triangle([(0, 0), (1, 1), (2, 0)], "white")
        assert out.startswith('<polygon points="0,0 1,1 2,0" style="fill: white;')

    def test_translate_wraps_children(self):
        assert svg.translate(1, 2, ["<a/>", "<b/>"]) == (
            '<g transform="translate(1,2)"><a/><b/></g>'
        )

    def test_document(self):
        out = svg.document(5, 6, "<d/>", "<body/>")
        assert out.endswith("<defs><d/></defs><body/></svg>")
