"""
Element-wise conversion between container types for textconv.

Structure is always preserved:
- pair: ``first`` and ``second`` are converted independently.
- list / variadic tuple: every element is converted, order and length kept.
- dict: every key and every value is converted into a fresh dict.

Dict sources are walked in sorted key order.  When two source keys convert
to the same target key (e.g. ``"2"`` and ``"02"`` into ``int``), the entry
visited later overwrites the earlier one without raising.

The element converter is passed in by the engine as ``convert(target, value)``
so this module stays free of the registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import numpy as np

from textconv.converters.rendering import ordered_items
from textconv.exceptions import UnsupportedConversionError

logger = logging.getLogger(__name__)

Convert = Callable[[Any, Any], Any]

# Source types accepted where an ordered sequence is expected
_SEQUENCE_SOURCES = (list, tuple, np.ndarray)


def _describe(value: Any) -> str:
    return type(value).__name__


def to_pair(first_type: Any, second_type: Any, value: Any, convert: Convert) -> tuple:
    """Convert a 2-element tuple/list into a ``(first_type, second_type)`` pair."""
    if not isinstance(value, _SEQUENCE_SOURCES) or len(value) != 2:
        raise UnsupportedConversionError(
            f"Cannot convert {_describe(value)} to a pair; "
            "expected a 2-element tuple or list"
        )
    first, second = value
    return (convert(first_type, first), convert(second_type, second))


def to_list(element_type: Any, value: Any, convert: Convert) -> list:
    """Convert every element of a list/tuple/array to *element_type*."""
    if not isinstance(value, _SEQUENCE_SOURCES):
        raise UnsupportedConversionError(
            f"Cannot convert {_describe(value)} to a list"
        )
    return [convert(element_type, item) for item in value]


def to_tuple(element_type: Any, value: Any, convert: Convert) -> tuple:
    """Like ``to_list()`` but returns a tuple (target ``tuple[T, ...]``)."""
    return tuple(to_list(element_type, value, convert))


def to_dict(key_type: Any, value_type: Any, value: Any, convert: Convert) -> dict:
    """Convert every key and value of a mapping, re-keying into a new dict."""
    if not isinstance(value, Mapping):
        raise UnsupportedConversionError(
            f"Cannot convert {_describe(value)} to a dict"
        )
    result: dict = {}
    for key, item in ordered_items(value):
        new_key = convert(key_type, key)
        if new_key in result:
            logger.debug(
                "Key %r converts to existing key %r; later entry wins", key, new_key
            )
        result[new_key] = convert(value_type, item)
    return result
