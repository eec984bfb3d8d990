"""
Parse options model and YAML I/O for textconv.

``ParseOptions`` bundles the three markers used by ``textconv.sequence.parse``:

- lbracket: opening bracket expected before the first field (default ``[``).
- rbracket: closing bracket expected after the last field (default ``]``).
- comma: field separator (default ``,``).

An empty marker means "no bracket expected" (or, for ``comma``, "no
separator": the whole interior is one field).  Only the first character of
a marker is ever compared against the text; longer markers are accepted but
logged as a warning.

Instances are frozen.  Build them with keyword arguments, the fluent
``with_*`` methods (each returns a new instance) or the free functions::

    ParseOptions(comma=" ")
    ParseOptions().with_lbracket("(").with_rbracket(")")
    comma(";")

Key functions:
- load_options(path) -> ParseOptions: Load and validate from YAML.
- save_options(options, path): Serialize to YAML.
- options_from_mapping(raw) -> ParseOptions: Validate a plain mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from textconv.exceptions import OptionsValidationError

logger = logging.getLogger(__name__)


class ParseOptions(BaseModel):
    """Bracket and separator markers for sequence parsing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lbracket: str = Field("[", description="Opening bracket; empty for none")
    rbracket: str = Field("]", description="Closing bracket; empty for none")
    comma: str = Field(",", description="Field separator; empty for none")

    @field_validator("lbracket", "rbracket", "comma")
    @classmethod
    def _warn_multi_char(cls, value: str, info: ValidationInfo) -> str:
        if len(value) > 1:
            logger.warning(
                "%s marker %r has %d characters; only %r is matched",
                info.field_name, value, len(value), value[0],
            )
        return value

    # -- first-character accessors used by the parser -------------------

    @property
    def open_char(self) -> str:
        """First character of ``lbracket``, or ``""`` when none is expected."""
        return self.lbracket[:1]

    @property
    def close_char(self) -> str:
        """First character of ``rbracket``, or ``""`` when none is expected."""
        return self.rbracket[:1]

    @property
    def separator(self) -> str:
        """First character of ``comma``, or ``""`` when fields are not split."""
        return self.comma[:1]

    # -- fluent setters ---------------------------------------------------

    def _replace(self, **changes: str) -> ParseOptions:
        # Validate only the changed markers; the rest were checked when self was built
        validated = ParseOptions(**changes)
        return self.model_copy(update={name: getattr(validated, name) for name in changes})

    def with_lbracket(self, marker: str) -> ParseOptions:
        return self._replace(lbracket=marker)

    def with_rbracket(self, marker: str) -> ParseOptions:
        return self._replace(rbracket=marker)

    def with_comma(self, marker: str) -> ParseOptions:
        return self._replace(comma=marker)


DEFAULT_OPTIONS = ParseOptions()


def lbracket(marker: str) -> ParseOptions:
    """Default options with the opening bracket replaced by *marker*."""
    return ParseOptions(lbracket=marker)


def rbracket(marker: str) -> ParseOptions:
    """Default options with the closing bracket replaced by *marker*."""
    return ParseOptions(rbracket=marker)


def comma(marker: str) -> ParseOptions:
    """Default options with the separator replaced by *marker*."""
    return ParseOptions(comma=marker)


def options_from_mapping(raw: Any) -> ParseOptions:
    """Validate a plain mapping (e.g. a YAML document) into ``ParseOptions``.

    Missing keys keep their defaults.

    Raises:
        OptionsValidationError: If *raw* is not a mapping.
        pydantic.ValidationError: If keys are unknown or values are not strings.
    """
    if not isinstance(raw, Mapping):
        raise OptionsValidationError(
            f"Parse options must be a mapping, got {type(raw).__name__}"
        )
    return ParseOptions.model_validate(dict(raw))


def load_options(path: str | Path) -> ParseOptions:
    """Load and validate parse options from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OptionsValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise OptionsValidationError(f"Options file is empty: {path}")
    options = options_from_mapping(raw)
    logger.info("Loaded parse options from %s", path)
    return options


def save_options(options: ParseOptions, path: str | Path) -> None:
    """Serialize parse options to a human-editable YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = options.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# textconv parse options\n")
        f.write("# Empty strings disable a bracket or the separator.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved parse options to %s", path)
