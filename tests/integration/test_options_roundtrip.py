"""
Integration tests: parse options file round-trip.

Tests the full cycle: save options -> hand-edit YAML -> load -> parse.
Verifies that edited markers are honoured by the sequence parser.
"""

from __future__ import annotations

import pytest

from textconv import ParseOptions, load_options, parse, save_options


@pytest.mark.integration
class TestOptionsRoundtrip:
    """Tests for the options-file workflow."""

    def test_saved_defaults_parse_default_syntax(self, tmp_path):
        path = tmp_path / "options.yaml"
        save_options(ParseOptions(), path)
        opts = load_options(path)
        assert parse(list[int], "[0, 1, 2]", opts) == [0, 1, 2]

    def test_hand_edited_file(self, tmp_path):
        """A user edits the file to parse "(a|b|c)" style sequences."""
        path = tmp_path / "options.yaml"
        save_options(ParseOptions(), path)

        text = path.read_text(encoding="utf-8")
        text = (
            text.replace("lbracket: '['", "lbracket: '('")
            .replace("rbracket: ']'", "rbracket: ')'")
            .replace("comma: ','", "comma: '|'")
        )
        path.write_text(text, encoding="utf-8")

        opts = load_options(path)
        assert opts == ParseOptions(lbracket="(", rbracket=")", comma="|")
        assert parse(list[str], "(a|b|c)", opts) == ["a", "b", "c"]

    def test_bracketless_options_survive_roundtrip(self, tmp_path):
        path = tmp_path / "bare.yaml"
        save_options(ParseOptions(lbracket="", rbracket="", comma=" "), path)
        opts = load_options(path)
        assert opts.lbracket == ""
        assert parse(list[float], "1.5 2.5 0x10", opts) == [1.5, 2.5, 16.0]
