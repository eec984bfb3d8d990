"""
Unit tests for parse options and YAML I/O (textconv.options).

Tests Pydantic model defaults and immutability, the fluent setters and
free constructor functions, first-character accessors, and loading/saving.
"""

import pytest
from pydantic import ValidationError

from textconv.exceptions import OptionsValidationError
from textconv.options import (
    DEFAULT_OPTIONS,
    ParseOptions,
    comma,
    lbracket,
    load_options,
    options_from_mapping,
    rbracket,
    save_options,
)


# ---------------------------------------------------------------------------
# ParseOptions model
# ---------------------------------------------------------------------------

class TestParseOptions:
    """Tests for ParseOptions defaults and validation."""

    def test_defaults(self):
        opts = ParseOptions()
        assert opts.lbracket == "["
        assert opts.rbracket == "]"
        assert opts.comma == ","

    def test_default_options_constant(self):
        assert DEFAULT_OPTIONS == ParseOptions()

    def test_frozen(self):
        opts = ParseOptions()
        with pytest.raises(ValidationError):
            opts.comma = ";"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="separator_char"):
            ParseOptions(separator_char=";")

    def test_non_string_marker_rejected(self):
        with pytest.raises(ValidationError, match="comma"):
            ParseOptions(comma=1)

    def test_empty_markers_allowed(self):
        opts = ParseOptions(lbracket="", rbracket="", comma="")
        assert opts.open_char == ""
        assert opts.close_char == ""
        assert opts.separator == ""

    def test_first_char_accessors(self):
        opts = ParseOptions(lbracket="<<", rbracket=">>", comma="::")
        assert opts.open_char == "<"
        assert opts.close_char == ">"
        assert opts.separator == ":"

    def test_multi_char_marker_warns(self, caplog):
        with caplog.at_level("WARNING", logger="textconv.options"):
            ParseOptions(comma=", ")
        assert "only ','" in caplog.text

    def test_setter_warns_only_for_changed_marker(self, caplog):
        """Unchanged multi-char markers are not re-reported by with_*."""
        with caplog.at_level("WARNING", logger="textconv.options"):
            opts = ParseOptions(comma=", ")
            caplog.clear()
            updated = opts.with_lbracket("(").with_rbracket(")")
        assert caplog.records == []
        assert updated == ParseOptions(lbracket="(", rbracket=")", comma=", ")

    def test_setter_warns_for_new_multi_char_marker(self, caplog):
        with caplog.at_level("WARNING", logger="textconv.options"):
            ParseOptions().with_rbracket("]]")
        assert len(caplog.records) == 1
        assert "rbracket" in caplog.text

    def test_hashable_and_comparable(self):
        assert ParseOptions(comma=";") == ParseOptions(comma=";")
        assert len({ParseOptions(), ParseOptions()}) == 1


# ---------------------------------------------------------------------------
# Fluent setters and free functions
# ---------------------------------------------------------------------------

class TestBuilders:
    """Tests for with_* setters and lbracket()/rbracket()/comma()."""

    def test_fluent_chain(self):
        opts = ParseOptions().with_lbracket("(").with_rbracket(")").with_comma(";")
        assert (opts.lbracket, opts.rbracket, opts.comma) == ("(", ")", ";")

    def test_fluent_returns_new_instance(self):
        base = ParseOptions()
        changed = base.with_comma(" ")
        assert base.comma == ","
        assert changed.comma == " "
        assert changed is not base

    def test_free_functions_override_one_field(self):
        assert lbracket("") == ParseOptions(lbracket="")
        assert rbracket("") == ParseOptions(rbracket="")
        assert comma(" ") == ParseOptions(comma=" ")

    def test_free_function_result_is_chainable(self):
        opts = comma(" ").with_lbracket("")
        assert opts == ParseOptions(lbracket="", comma=" ")

    def test_fluent_setter_validates(self):
        with pytest.raises(ValidationError):
            ParseOptions().with_comma(None)


# ---------------------------------------------------------------------------
# Mapping / YAML I/O
# ---------------------------------------------------------------------------

class TestOptionsIO:
    """Tests for options_from_mapping(), load_options(), save_options()."""

    def test_from_mapping_partial(self):
        opts = options_from_mapping({"comma": ";"})
        assert opts == ParseOptions(comma=";")

    def test_from_mapping_rejects_non_mapping(self):
        with pytest.raises(OptionsValidationError):
            options_from_mapping(["comma", ";"])

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "options.yaml"
        opts = ParseOptions(lbracket="", rbracket="", comma=" ")
        save_options(opts, path)
        assert path.exists()
        assert load_options(path) == opts

    def test_saved_file_is_readable_yaml(self, tmp_path):
        path = tmp_path / "options.yaml"
        save_options(ParseOptions(comma=";"), path)
        text = path.read_text(encoding="utf-8")
        assert text.startswith("# textconv parse options")
        assert "comma:" in text
        assert "lbracket:" in text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(OptionsValidationError, match="empty"):
            load_options(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(OptionsValidationError):
            load_options(path)

    def test_unknown_key_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("comma: ';'\nquote: '\"'\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="quote"):
            load_options(path)
