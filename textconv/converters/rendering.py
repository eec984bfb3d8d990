"""
Text rendering rules for textconv.

Produces the ``str`` (and ``bytes``) form of any convertible value:

  bool / np.bool_    -> "true" / "false"
  numpy integers     -> decimal integer ("-1" for np.int8(-1), never a glyph)
  bytes              -> decoded with the locale's preferred encoding
  2-tuple            -> "(a, b)"
  list, other tuple,
  np.ndarray         -> "[e0, e1, e2]"        ("" when empty)
  mapping            -> "{k0: v0, k1: v1}"    ("" when empty, keys sorted)
  anything else      -> str(value)

Rendering is recursive: every element, key and value is rendered with the
same rules, so nested containers and caller-defined types (via their
``__str__``) work inside pairs, lists and mappings.  Nothing is trimmed,
padded or quoted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from textconv.converters.strings import decode_text, encode_text
from textconv.exceptions import UnsupportedConversionError


def ordered_items(mapping: Mapping) -> list[tuple[Any, Any]]:
    """Return the mapping's items sorted by key.

    Raises:
        UnsupportedConversionError: If the keys cannot be ordered
            (e.g. a mix of ``int`` and ``str`` keys).
    """
    try:
        return sorted(mapping.items(), key=lambda item: item[0])
    except TypeError as exc:
        raise UnsupportedConversionError(
            f"Mapping keys are not mutually orderable: {list(mapping)!r}"
        ) from exc


def render_pair(pair: tuple[Any, Any]) -> str:
    first, second = pair
    return f"({render_text(first)}, {render_text(second)})"


def render_list(items: list | tuple | np.ndarray) -> str:
    if len(items) == 0:
        return ""
    return "[" + ", ".join(render_text(item) for item in items) + "]"


def render_mapping(mapping: Mapping) -> str:
    if not mapping:
        return ""
    entries = (
        f"{render_text(key)}: {render_text(value)}"
        for key, value in ordered_items(mapping)
    )
    return "{" + ", ".join(entries) + "}"


def render_text(value: Any) -> str:
    """Render *value* as ``str`` following the table in the module docstring."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return decode_text(value)
    # bool before integers: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, np.integer):
        return str(int(value))
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return render_text(value[()])
    if isinstance(value, tuple) and len(value) == 2:
        return render_pair(value)
    if isinstance(value, (list, tuple, np.ndarray)):
        return render_list(value)
    if isinstance(value, Mapping):
        return render_mapping(value)
    return str(value)


def render_bytes(value: Any) -> bytes:
    """Render *value* as text, then encode it to narrow (multibyte) text."""
    if isinstance(value, bytes):
        return value
    return encode_text(render_text(value))
