"""
Numeric and boolean conversion rules for textconv.

Text sources (``str`` or ``bytes``) go through the same three steps for
every numeric target:
1. Trim the fixed whitespace set from both ends (blank text is rejected).
2. Reject literals that still contain whitespace (e.g. ``"12 34"``).
3. Pick the base: a leading ``0x`` means base 16, anything else base 10.

Fixed-width numpy integer targets (``np.int8``, ``np.uint8``, ... ``np.uint64``)
are always produced by converting to a full-width Python ``int`` first and
then wrapping modulo 2**bits.  So ``"0xFF"`` becomes 255 and then -1 for
``np.int8``; ``300`` becomes 44 for ``np.uint8``.

Booleans follow the truthiness rule: text is ``True`` unless it is exactly
empty (``"false"`` and ``"  "`` are both ``True``); numbers use ``bool()``.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

import numpy as np

from textconv.converters.strings import as_text, contains_space, has_hex_prefix, trim
from textconv.exceptions import (
    ConversionError,
    EmbeddedWhitespaceError,
    InvalidLiteralError,
    UnsupportedConversionError,
)

# Literal grammars (ASCII digits only; no underscores, no "inf"/"nan")
_DECIMAL_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_HEX_INT_RE = re.compile(r"0x[0-9A-Fa-f]+\Z")
_DECIMAL_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z"
)


def is_numeric(value: Any) -> bool:
    """True for Python/numpy real numbers and booleans (numpy bools included)."""
    return isinstance(value, (numbers.Real, np.bool_))


def _literal(value: str | bytes) -> str:
    """Trim a textual numeric literal and check it has no inner whitespace."""
    text = trim(as_text(value))
    if contains_space(text):
        raise EmbeddedWhitespaceError(
            f"Numeric literal contains whitespace after trimming: {text!r}"
        )
    return text


def parse_int_literal(value: str | bytes) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal integer literal.

    Leading zeros are accepted in both bases (``"001234"``, ``"0x000000FF"``).

    Raises:
        EmptyInputError: If the text is blank.
        EmbeddedWhitespaceError: If the trimmed text contains whitespace.
        InvalidLiteralError: If the trimmed text is not a literal in its base.
    """
    text = _literal(value)
    if has_hex_prefix(text):
        if not _HEX_INT_RE.match(text):
            raise InvalidLiteralError(f"Invalid hexadecimal integer: {text!r}")
        return int(text[2:], 16)
    if not _DECIMAL_INT_RE.match(text):
        raise InvalidLiteralError(f"Invalid decimal integer: {text!r}")
    return int(text)


def parse_float_literal(value: str | bytes) -> float:
    """Parse a decimal floating point literal, or a ``0x`` hex integer as float.

    Raises:
        EmptyInputError: If the text is blank.
        EmbeddedWhitespaceError: If the trimmed text contains whitespace.
        InvalidLiteralError: If the trimmed text is not a valid literal.
    """
    text = _literal(value)
    if has_hex_prefix(text):
        if not _HEX_INT_RE.match(text):
            raise InvalidLiteralError(f"Invalid hexadecimal number: {text!r}")
        return _int_to_float(int(text[2:], 16))
    if not _DECIMAL_FLOAT_RE.match(text):
        raise InvalidLiteralError(f"Invalid floating point number: {text!r}")
    return float(text)


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise ConversionError(f"Integer too large for float: {value}") from exc


def to_int(value: Any) -> int:
    """Convert text or a number to a full-width Python ``int``.

    Floats are truncated toward zero.  Non-finite floats cannot be
    represented and raise ``ConversionError``.
    """
    if isinstance(value, (str, bytes)):
        return parse_int_literal(value)
    if is_numeric(value):
        if isinstance(value, (float, np.floating)) and not math.isfinite(value):
            raise ConversionError(f"Cannot convert non-finite {value!r} to int")
        return int(value)
    raise UnsupportedConversionError(
        f"Cannot convert {type(value).__name__} to int"
    )


def to_fixed_width(target: type, value: Any) -> np.integer:
    """Convert to a numpy fixed-width integer type by full-width parse + wrap.

    Args:
        target: A numpy integer scalar type such as ``np.int8`` or ``np.uint8``.
        value: Text or a number.

    Returns:
        An instance of *target* holding ``to_int(value)`` modulo 2**bits,
        reinterpreted as two's complement for signed types.
    """
    full = to_int(value)
    dtype = np.dtype(target)
    bits = dtype.itemsize * 8
    unsigned = np.dtype(f"u{dtype.itemsize}").type
    # numpy rejects out-of-range Python ints, so mask first; the
    # unsigned -> target cast then reinterprets the bits.
    return unsigned(full & ((1 << bits) - 1)).astype(dtype)


def to_float(value: Any) -> float:
    """Convert text or a number to a Python ``float``."""
    if isinstance(value, (str, bytes)):
        return parse_float_literal(value)
    if is_numeric(value):
        if isinstance(value, int):
            return _int_to_float(value)
        return float(value)
    raise UnsupportedConversionError(
        f"Cannot convert {type(value).__name__} to float"
    )


def to_numpy_float(target: type, value: Any) -> np.floating:
    """Convert to a numpy floating type (``np.float32``, ``np.float64``)."""
    return target(to_float(value))


def to_bool(value: Any) -> bool:
    """Convert text or a number to ``bool`` using the truthiness rule.

    Text is never trimmed: only ``""`` / ``b""`` yield ``False``.
    """
    if isinstance(value, (str, bytes)):
        return len(value) != 0
    if is_numeric(value):
        return bool(value)
    raise UnsupportedConversionError(
        f"Cannot convert {type(value).__name__} to bool"
    )
