"""
Unit tests for element-wise container conversion (textconv.converters.containers).

The element converter is the real engine ``to()`` so these tests also show
how nested element types flow through.
"""

from __future__ import annotations

import numpy as np
import pytest

from textconv.converters.containers import to_dict, to_list, to_pair, to_tuple
from textconv.engine import to
from textconv.exceptions import UnsupportedConversionError


class TestToPair:
    """Tests for to_pair()."""

    def test_converts_each_side_independently(self):
        assert to_pair(str, float, (1, "2.5"), to) == ("1", 2.5)

    def test_list_source(self):
        assert to_pair(int, int, ["0x10", "10"], to) == (16, 10)

    def test_wrong_length_rejected(self):
        with pytest.raises(UnsupportedConversionError):
            to_pair(int, int, (1, 2, 3), to)

    def test_non_sequence_rejected(self):
        with pytest.raises(UnsupportedConversionError):
            to_pair(int, int, "12", to)


class TestToList:
    """Tests for to_list() / to_tuple()."""

    def test_preserves_order_and_length(self):
        assert to_list(int, ["3", "1", "2"], to) == [3, 1, 2]

    def test_empty(self):
        assert to_list(int, [], to) == []

    def test_tuple_source(self):
        assert to_list(str, (1, True), to) == ["1", "true"]

    def test_numpy_array_source(self):
        assert to_list(int, np.array([1, 2]), to) == [1, 2]

    def test_narrow_elements(self):
        result = to_list(np.int8, ["0xFF", "1"], to)
        assert result == [-1, 1]
        assert all(isinstance(v, np.int8) for v in result)

    def test_does_not_mutate_input(self):
        source = ["1", "2"]
        to_list(int, source, to)
        assert source == ["1", "2"]

    def test_text_source_rejected(self):
        with pytest.raises(UnsupportedConversionError):
            to_list(int, "[1, 2]", to)

    def test_to_tuple(self):
        assert to_tuple(float, ["1", "2"], to) == (1.0, 2.0)


class TestToDict:
    """Tests for to_dict()."""

    def test_converts_keys_and_values(self):
        assert to_dict(int, str, {"1": 10, "2": 20}, to) == {1: "10", 2: "20"}

    def test_result_is_new_dict(self):
        source = {"a": 1}
        result = to_dict(str, int, source, to)
        assert result == source
        assert result is not source

    def test_colliding_keys_later_sorted_key_wins(self):
        """"02" sorts before "2"; both become 2, so the "2" entry survives."""
        assert to_dict(int, int, {"2": 20, "02": 10}, to) == {2: 20}

    def test_non_mapping_rejected(self):
        with pytest.raises(UnsupportedConversionError):
            to_dict(str, int, [("a", 1)], to)
