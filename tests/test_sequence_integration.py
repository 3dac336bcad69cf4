"""Integration tests -- end-to-end compile of diagram text to SVG plus errors."""
from __future__ import annotations

import re

import pytest

from pretty_sequence import (
    compile_diagram,
    render_diagram,
    RenderOptions,
    DiagramCompileError,
)


class TestCompile:
    def test_compiles_a_basic_diagram(self):
        result = compile_diagram("A->B: hello")
        assert result.ok
        assert result.report == ""
        assert result.document.startswith("<svg")
        assert result.document.endswith("</svg>")
        assert "hello" in result.document

    def test_canvas_size(self):
        result = compile_diagram("A->B: hello")
        # width: 2 * 150 - 25 + 10; height: header 60 + body 30 + mirrored header 60 + 10
        assert 'width="285" height="160"' in result.document

    def test_canvas_uses_tallest_participant_header(self):
        result = compile_diagram('participant "Two\\nLines" as A\nA->B: x')
        # header 80, body 30
        assert 'width="285" height="200"' in result.document

    def test_shared_gradient_definition(self):
        doc = render_diagram("A->B: hello")
        assert doc.count("<linearGradient") == 1
        assert '<linearGradient id="grad1"' in doc
        assert doc.count('fill: url(#grad1)') == 4

    def test_participants_are_drawn_at_top_and_bottom(self):
        doc = render_diagram("A->B: hello")
        assert doc.count(">A</text>") == 2
        assert doc.count(">B</text>") == 2
        # lifelines run from under the header box down to the bottom box
        assert '<line x1="62.5" y1="30" x2="62.5" y2="90"' in doc

    def test_participants_render_before_the_body(self):
        doc = render_diagram("A->B: hello")
        assert doc.index(">A</text>") < doc.index(">hello</text>")

    def test_parallel_body_height(self):
        doc = render_diagram("parallel {\nA->B: x\nB->C: y\\nz\n}")
        # 3 participants: 435 wide; 60 + max(30, 50) + 60 + 10
        assert 'width="435" height="180"' in doc

    def test_output_is_deterministic(self):
        text = (
            "autonumber 1\n"
            'participant "Client" as C\n'
            "loop every minute\n"
            "C->S: poll\n"
            "alt has work\n"
            "S-->C: job\n"
            "else idle\n"
            "S-->>C: nothing\n"
            "end\n"
            "end\n"
            "state over S: sleeping"
        )
        assert compile_diagram(text) == compile_diagram(text)

    def test_escapes_markup_in_labels(self):
        doc = render_diagram("A->B: a<b & c")
        assert "a&lt;b &amp; c" in doc
        assert "a<b" not in doc

    def test_autonumbered_labels_are_rendered(self):
        doc = render_diagram("autonumber 3\nA->B: first\nB->A: second")
        assert ">[3] first</text>" in doc
        assert ">[4] second</text>" in doc


class TestErrorReport:
    def test_lone_end_falls_back_to_placeholder(self):
        result = compile_diagram("end")
        assert result.report == "E: line 1"
        assert result.document == "Nothing to draw yet."
        assert not result.ok

    def test_empty_text_is_clean_but_empty(self):
        result = compile_diagram("")
        assert result.ok
        assert result.document == "Nothing to draw yet."

    def test_unterminated_block_still_renders(self):
        result = compile_diagram("opt\nA->B: x")
        assert result.report == "E: missing closing 'end' tag before the end of the code"
        assert ">opt</text>" in result.document
        assert ">x</text>" in result.document

    def test_errors_are_listed_per_line(self):
        result = compile_diagram("A->B: x\nbogus line\n}\nB->A: y\nloop z")
        assert result.report.split("\n") == [
            "E: line 2",
            "E: line 3",
            "E: missing closing 'end' tag before the end of the code",
        ]
        assert [e.kind for e in result.errors] == ["syntax", "scope", "unterminated"]
        assert ">y</text>" in result.document

    def test_windows_line_endings(self):
        result = compile_diagram("A->B: x\r\nB->A: y\r\n")
        assert result.ok
        assert ">y</text>" in result.document

    @pytest.mark.parametrize("brk", ["\x0c", "\x0b", "\x85", "\u2028", "\u2029"])
    def test_only_newline_ends_a_statement(self, brk):
        result = compile_diagram(f"A->B: page{brk}break\nend")
        assert result.report == "E: line 2"
        assert f">page{brk}break</text>" in result.document

    def test_custom_separator(self):
        result = compile_diagram("x\ny", RenderOptions(error_separator="<br/>"))
        assert result.report == "E: line 1<br/>E: line 2"

    def test_raise_for_errors(self):
        result = compile_diagram("A->B: x\nnope")
        with pytest.raises(DiagramCompileError) as exc_info:
            result.raise_for_errors()
        assert isinstance(exc_info.value, ValueError)
        assert str(exc_info.value) == "E: line 2"
        assert [e.line for e in exc_info.value.errors] == [2]

    def test_raise_for_errors_is_silent_when_clean(self):
        compile_diagram("A->B: x").raise_for_errors()


class TestOptions:
    def test_default_palette(self):
        doc = render_diagram("A->B: x")
        assert "stroke:black" in doc
        assert "stop-color:rgb(200, 200, 200)" in doc
        assert "stop-color:rgb(100,100,100)" in doc

    def test_named_theme(self):
        doc = render_diagram("A->B: x", RenderOptions(theme="slate"))
        assert "stroke:#334155" in doc
        assert "stroke:black" not in doc
        assert "fill:#0f172a" in doc

    def test_color_overrides_apply_on_top_of_theme(self):
        doc = render_diagram("A->B: x", RenderOptions(theme="slate", stroke="red"))
        assert "stroke:red" in doc
        assert "stop-color:#e2e8f0" in doc

    def test_unknown_theme_raises(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            compile_diagram("A->B: x", RenderOptions(theme="no-such-theme"))

    def test_font_is_set_on_root(self):
        doc = render_diagram("A->B: x", RenderOptions(font="monospace"))
        assert re.match(r'<svg [^>]*style="font-family:monospace"', doc)

    def test_font_and_colors_are_escaped(self):
        doc = render_diagram(
            "A->B: x",
            RenderOptions(font='"><script>', stroke='red"/><x y="'),
        )
        assert "<script>" not in doc
        assert 'style="font-family:&quot;&gt;&lt;script&gt;"' in doc
        assert 'stroke:red&quot;/&gt;&lt;x y=&quot;' in doc
