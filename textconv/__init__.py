"""
textconv: "stringify anything, parse anything simple" helpers.

Public API surface:

- ``to(target, value)`` -- **the conversion entry point**.  Converts numbers,
  text (``str`` / ``bytes``) and tuples/lists/dicts to the type *target*::

      to(int, "  0x000000FF ")        # 255
      to(np.uint8, "0xFF")            # 255
      to(np.int8, "0xFF")             # -1
      to(bool, "false")               # True  (only "" is False)
      to(str, 3.14)                   # "3.14"
      to(str, [0, 1, 2])              # "[0, 1, 2]"
      to(str, {"b": 1, "a": 0})       # "{a: 0, b: 1}"
      to(bytes, "Hello")              # b"Hello"
      to(dict[str, int], {1: "2"})    # {"1": 2}

- ``parse(target, text, options=None)`` -- split a delimited sequence and
  convert each field::

      parse(list[int], "[0, 1, 2]")          # [0, 1, 2]
      parse(list[int], "[0 1 2]", comma(" "))
      parse(list[int], "0,1,2]", lbracket(""))

- ``ParseOptions`` plus ``lbracket()`` / ``rbracket()`` / ``comma()`` --
  immutable bracket and separator configuration.

- ``register_converter(target, func)`` -- teach ``to()`` a new target type.

- ``version()`` -- the library version string.

All failures raise subclasses of ``textconv.exceptions.TextconvError``.
"""

from __future__ import annotations

from textconv.engine import converter_for, register_converter, to
from textconv.exceptions import (
    BracketMismatchError,
    ConversionError,
    EmbeddedWhitespaceError,
    EmptyFieldError,
    EmptyInputError,
    InvalidLiteralError,
    OptionsValidationError,
    PreconditionError,
    TextconvError,
    TranscodingError,
    UnsupportedConversionError,
)
from textconv.options import (
    ParseOptions,
    comma,
    lbracket,
    load_options,
    rbracket,
    save_options,
)
from textconv.sequence import parse, split_fields

__version__ = "0.3.0"

__all__ = [
    "to",
    "parse",
    "split_fields",
    "converter_for",
    "register_converter",
    "ParseOptions",
    "lbracket",
    "rbracket",
    "comma",
    "load_options",
    "save_options",
    "version",
    "TextconvError",
    "PreconditionError",
    "EmptyInputError",
    "EmbeddedWhitespaceError",
    "BracketMismatchError",
    "EmptyFieldError",
    "ConversionError",
    "InvalidLiteralError",
    "TranscodingError",
    "UnsupportedConversionError",
    "OptionsValidationError",
]


def version() -> str:
    """Return the library version string (immutable, set at import time)."""
    return __version__
