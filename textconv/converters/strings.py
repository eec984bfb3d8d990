"""
Shared text helpers for textconv.

- ``WHITESPACE``: the fixed whitespace set used for trimming.  This is
  not ``str.isspace()``: form feed and Unicode spaces are
  ordinary characters here.
- ``trim()``: strip WHITESPACE from both ends, rejecting blank text.
- ``has_hex_prefix()``: detect the lowercase ``0x`` prefix.
- ``decode_text()`` / ``encode_text()``: transcode between ``bytes``
  (narrow, multibyte text) and ``str`` (wide text).  The default codec is the
  locale's preferred encoding, matching what the platform's multibyte
  conversion functions use.
"""

from __future__ import annotations

import locale

from textconv.exceptions import EmptyInputError, TranscodingError

WHITESPACE = " \t\v\r\n"

HEX_PREFIX = "0x"


def find_first_not_space(text: str, start: int = 0) -> int:
    """Index of the first non-whitespace char at or after *start*, or -1."""
    for i in range(start, len(text)):
        if text[i] not in WHITESPACE:
            return i
    return -1


def find_last_not_space(text: str, end: int | None = None) -> int:
    """Index of the last non-whitespace char at or before *end*, or -1."""
    if end is None:
        end = len(text) - 1
    for i in range(end, -1, -1):
        if text[i] not in WHITESPACE:
            return i
    return -1


def trim(text: str) -> str:
    """Strip WHITESPACE from both ends of *text*.

    Raises:
        EmptyInputError: If *text* is empty or whitespace only.
    """
    trimmed = text.strip(WHITESPACE)
    if not trimmed:
        raise EmptyInputError(f"Expected non-whitespace content, got {text!r}")
    return trimmed


def contains_space(text: str) -> bool:
    return any(c in WHITESPACE for c in text)


def has_hex_prefix(text: str) -> bool:
    """True when *text* starts with ``0x`` (case-sensitive, no sign allowed)."""
    return text.startswith(HEX_PREFIX)


def default_encoding() -> str:
    return locale.getpreferredencoding(False)


def decode_text(data: bytes, encoding: str | None = None) -> str:
    """Decode narrow text to ``str``.

    Raises:
        TranscodingError: If *data* is not valid in *encoding*.
    """
    encoding = encoding or default_encoding()
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise TranscodingError(
            f"Cannot decode {data!r} using {encoding}: {exc.reason}"
        ) from exc


def encode_text(text: str, encoding: str | None = None) -> bytes:
    """Encode ``str`` to narrow text.

    Raises:
        TranscodingError: If *text* has characters *encoding* cannot represent.
    """
    encoding = encoding or default_encoding()
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise TranscodingError(
            f"Cannot encode {text!r} using {encoding}: {exc.reason}"
        ) from exc


def as_text(value: str | bytes) -> str:
    """Return *value* as ``str``, decoding ``bytes`` with the default codec."""
    if isinstance(value, bytes):
        return decode_text(value)
    return value
