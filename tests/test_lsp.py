"""Tests for the LSP server — range formatting edits."""

from __future__ import annotations

from lsprotocol.types import Position, Range

from blockstr.lsp import _range_edits

URI = "file:///test.py"

SOURCE = 'def f():\n    x = """\n        a\n          b\n        """\n'


def _range(sl: int, sc: int, el: int, ec: int) -> Range:
    return Range(start=Position(line=sl, character=sc), end=Position(line=el, character=ec))


# ---------------------------------------------------------------------------
# Range formatting
# ---------------------------------------------------------------------------


class TestRangeFormatting:
    def test_literal_body_reindented(self, lsp_env) -> None:
        ls, put = lsp_env
        put(SOURCE)
        # From just after the opening quotes to just before the closing ones
        rng = _range(1, 11, 4, 8)
        edits = _range_edits(ls, URI, rng)

        assert len(edits) == 1
        assert edits[0].range == rng
        assert edits[0].new_text == "a\n  b"

    def test_single_line_selection_no_edit(self, lsp_env) -> None:
        ls, put = lsp_env
        put(SOURCE)
        assert _range_edits(ls, URI, _range(0, 0, 0, 8)) == []

    def test_empty_selection_no_edit(self, lsp_env) -> None:
        ls, put = lsp_env
        put(SOURCE)
        assert _range_edits(ls, URI, _range(2, 3, 2, 3)) == []

    def test_already_normal_no_edit(self, lsp_env) -> None:
        ls, put = lsp_env
        put("a\nb\n")
        assert _range_edits(ls, URI, _range(0, 0, 1, 1)) == []

    def test_first_line_content_kept(self, lsp_env) -> None:
        ls, put = lsp_env
        put("  oops\n    test\n    ")
        edits = _range_edits(ls, URI, _range(0, 0, 2, 4))
        assert edits[0].new_text == "  oops\ntest"


# ---------------------------------------------------------------------------
# Position encoding (UTF-16 code units by default)
# ---------------------------------------------------------------------------


class TestPositionEncoding:
    def test_astral_character_before_selection(self, lsp_env) -> None:
        ls, put = lsp_env
        put('😀 = """head\n        a\n          b\n        """\n')
        # The emoji is two UTF-16 code units, so "head" starts at character 8
        edits = _range_edits(ls, URI, _range(0, 8, 3, 8))

        assert len(edits) == 1
        assert edits[0].new_text == "head\na\n  b"

    def test_astral_character_inside_body(self, lsp_env) -> None:
        ls, put = lsp_env
        put('x = """\n    😀 a\n      b\n    """')
        edits = _range_edits(ls, URI, _range(0, 7, 3, 4))

        assert edits[0].new_text == "😀 a\n  b"
