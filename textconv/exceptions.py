"""
Custom exception hierarchy for textconv.

Two families:
- PreconditionError: the caller broke the input contract (blank text,
  missing bracket, empty field).  These are programming errors rather than
  data errors, but they are raised as exceptions instead of aborting.
- ConversionError: the input was well-formed enough to look at, but no
  value of the target type can be produced from it.

Both families also derive from ``ValueError`` so generic callers that only
know about built-in exceptions still catch them.

Truncation of fixed-width integers and the "non-empty text is true" rule
are part of the conversion contract and never raise.
"""


class TextconvError(Exception):
    """Base exception for all textconv errors."""


class PreconditionError(TextconvError, ValueError):
    """Raised when an input violates the conversion/parsing contract."""


class EmptyInputError(PreconditionError):
    """Raised when text is empty or contains nothing but whitespace.

    Whitespace here is the fixed set space, tab, vertical tab, carriage
    return and newline.
    """


class EmbeddedWhitespaceError(PreconditionError):
    """Raised when a numeric literal still contains whitespace after trimming.

    For example ``"12 34"``.
    """


class BracketMismatchError(PreconditionError):
    """Raised when the configured opening/closing bracket is not where expected."""


class EmptyFieldError(PreconditionError):
    """Raised when a parsed sequence has an empty interior or an empty field.

    Only the final field of a sequence may be empty; an empty interior
    (including a single-character one) is rejected as a whole.
    """


class ConversionError(TextconvError, ValueError):
    """Raised when a value cannot be converted to the requested target type."""


class InvalidLiteralError(ConversionError):
    """Raised when trimmed text is not a valid literal in the selected base."""


class TranscodingError(ConversionError):
    """Raised when text cannot be encoded to, or decoded from, bytes."""


class UnsupportedConversionError(ConversionError):
    """Raised when no conversion rule exists for a (target, source) pair.

    For example converting a list to ``int`` or asking for a target type
    that has no registered converter.
    """


class OptionsValidationError(TextconvError):
    """Raised when a parse-options file or mapping cannot be used.

    Schema problems (unknown keys, non-string markers) surface as
    ``pydantic.ValidationError``; this covers the rest, e.g. an empty file
    or a document that is not a mapping.
    """
