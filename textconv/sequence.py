"""
Delimited-sequence parser for textconv.

Splits text such as ``"[0, 1, 2]"`` into fields and converts each field with
``textconv.engine.to()``:

    parse(list[int], "[0, 1, 2]")                  # [0, 1, 2]
    parse(list[int], "0 1 2", ParseOptions(lbracket="", rbracket="", comma=" "))
    parse(tuple[float, ...], "(1.5;2)", ParseOptions(lbracket="(", rbracket=")", comma=";"))

Algorithm (one left-to-right scan, no backtracking):
1. Skip leading whitespace; blank text -> EmptyInputError.
2. If an opening bracket is configured, the first non-whitespace character
   must be its first character (else BracketMismatchError); skip it and any
   whitespace after it.
3. Find the last non-whitespace character.
4. If a closing bracket is configured, that character must be its first
   character (else BracketMismatchError); step back over it and any
   whitespace before it.
5. The interior must span at least two characters (start < end), else
   EmptyFieldError.
6. Split the interior on the first character of the separator.  A field that
   would be empty before a separator -> EmptyFieldError.
7. The last field is always converted, even if it is empty.

Fields are not trimmed here; numeric element types trim on their own, while
``str`` elements keep their surrounding whitespace.  There is no quoting or
escaping, and brackets are not nested.
"""

from __future__ import annotations

import logging
from typing import Any, get_args, get_origin

from textconv.converters.strings import as_text, find_first_not_space, find_last_not_space
from textconv.engine import to
from textconv.exceptions import (
    BracketMismatchError,
    EmptyFieldError,
    EmptyInputError,
    UnsupportedConversionError,
)
from textconv.options import DEFAULT_OPTIONS, ParseOptions

logger = logging.getLogger(__name__)


def _collection_spec(target: Any) -> tuple[type, Any]:
    """Split a collection target into (container type, element type).

    Accepts ``list``, ``list[T]``, ``tuple`` and ``tuple[T, ...]``; bare
    containers produce ``str`` elements.
    """
    origin = get_origin(target) or target
    args = get_args(target)

    if origin is list:
        return list, (args[0] if args else str)
    if origin is tuple:
        if not args:
            return tuple, str
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple, args[0]
    raise UnsupportedConversionError(
        f"parse() target must be list[T] or tuple[T, ...], got {target!r}"
    )


def _interior_bounds(text: str, options: ParseOptions) -> tuple[int, int]:
    """Locate the inclusive [first, last] span between the brackets."""
    first = find_first_not_space(text)
    if first < 0:
        raise EmptyInputError(f"Expected a sequence, got blank text {text!r}")

    if options.open_char:
        if text[first] != options.open_char:
            raise BracketMismatchError(
                f"Expected {options.open_char!r} at position {first}, "
                f"found {text[first]!r} in {text!r}"
            )
        first = find_first_not_space(text, first + 1)

    last = find_last_not_space(text)

    if options.close_char:
        if text[last] != options.close_char:
            raise BracketMismatchError(
                f"Expected {options.close_char!r} at position {last}, "
                f"found {text[last]!r} in {text!r}"
            )
        last = find_last_not_space(text, last - 1)

    if first < 0 or last < 0 or not first < last:
        raise EmptyFieldError(
            f"Sequence interior is empty or a single character in {text!r}"
        )
    return first, last


def split_fields(text: str | bytes, options: ParseOptions | None = None) -> list[str]:
    """Return the raw (unconverted) fields of a delimited sequence.

    Raises:
        EmptyInputError: If *text* is blank.
        BracketMismatchError: If a configured bracket is missing.
        EmptyFieldError: If the interior is too short or a non-final field is empty.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    text = as_text(text)

    first, last = _interior_bounds(text, options)
    interior = text[first:last + 1]

    fields: list[str] = []
    separator = options.separator
    start = 0
    if separator:
        while True:
            pos = interior.find(separator, start)
            if pos < 0:
                break
            if pos == start:
                raise EmptyFieldError(
                    f"Empty field at position {first + start} in {text!r}"
                )
            fields.append(interior[start:pos])
            start = pos + 1
    fields.append(interior[start:])
    return fields


def parse(target: Any, text: str | bytes, options: ParseOptions | None = None) -> list | tuple:
    """Parse a delimited sequence and convert every field to the element type.

    Args:
        target: ``list[T]`` or ``tuple[T, ...]`` where ``T`` is any type
            ``textconv.to()`` can produce from text.  Bare ``list`` / ``tuple``
            keep the fields as ``str``.
        text: The sequence text (``bytes`` are decoded first).
        options: Bracket and separator markers; defaults to ``[``, ``]``, ``,``.

    Returns:
        A list (or tuple) with one converted element per field, in text order.

    Raises:
        EmptyInputError: If *text* is blank (or a numeric field is blank).
        BracketMismatchError: If a configured bracket is missing.
        EmptyFieldError: If the interior is too short or a non-final field is empty.
        ConversionError: If a field cannot be converted to the element type.
    """
    container, element_type = _collection_spec(target)
    fields = split_fields(text, options)
    logger.debug("Split %d field(s) for element type %r", len(fields), element_type)
    values = [to(element_type, field) for field in fields]
    return values if container is list else tuple(values)
