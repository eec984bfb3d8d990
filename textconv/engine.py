"""
Conversion engine for textconv.

``to(target, value)`` is the single entry point for every conversion.  The
target type selects the rule; the rule then looks at the source value:

    to(int, "0xFF")                     # 255
    to(np.int8, "0xFF")                 # -1
    to(bool, "false")                   # True (non-empty text)
    to(str, (10, 20))                   # "(10, 20)"
    to(str, {"a": 0, "b": 1})           # "{a: 0, b: 1}"
    to(list[str], [1, 2])               # ["1", "2"]
    to(dict[int, float], {"1": "2.5"})  # {1: 2.5}

Dispatch:
- Generic aliases (``list[T]``, ``tuple[T1, T2]``, ``tuple[T, ...]``,
  ``dict[K, V]``, their ``typing`` spellings and the bare ``list`` /
  ``tuple`` / ``dict`` types) are routed to the element-wise container
  converters, which call back into ``to()`` for every element.
- Every other target is looked up in a registry mapping target type ->
  one-argument converter.  The registry ships with rules for ``int``,
  ``float``, ``bool``, ``str``, ``bytes``, numpy fixed-width integers,
  numpy floats and ``typing.Any`` (identity).  Built-in rules are fixed:
  ``register_converter()`` can only add rules for new target types.

Targets are resolved from the type object alone; the source value is only
inspected by the selected rule.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, get_args, get_origin

import numpy as np

from textconv.converters.containers import to_dict, to_list, to_pair, to_tuple
from textconv.converters.numbers import (
    to_bool,
    to_fixed_width,
    to_float,
    to_int,
    to_numpy_float,
)
from textconv.converters.rendering import render_bytes, render_text
from textconv.exceptions import UnsupportedConversionError

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]

FIXED_WIDTH_INTEGERS: tuple[type, ...] = (
    np.int8, np.uint8,
    np.int16, np.uint16,
    np.int32, np.uint32,
    np.int64, np.uint64,
)

NUMPY_FLOATS: tuple[type, ...] = (np.float32, np.float64)

# Container origins, normalized to the concrete type that is produced
_CONTAINER_ORIGINS: dict[Any, type] = {
    list: list,
    Sequence: list,
    tuple: tuple,
    dict: dict,
    Mapping: dict,
}


def _identity(value: Any) -> Any:
    return value


def _builtin_converters() -> dict[Any, Converter]:
    """Build the default target-type -> converter table."""
    table: dict[Any, Converter] = {
        Any: _identity,
        int: to_int,
        float: to_float,
        bool: to_bool,
        str: render_text,
        bytes: render_bytes,
    }
    for target in FIXED_WIDTH_INTEGERS:
        table[target] = functools.partial(to_fixed_width, target)
    for target in NUMPY_FLOATS:
        table[target] = functools.partial(to_numpy_float, target)
    return table


_BUILTIN_CONVERTERS: Mapping[Any, Converter] = MappingProxyType(_builtin_converters())

# Caller-registered targets; never shadows a built-in or container target
_REGISTERED: dict[Any, Converter] = {}


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _is_reserved(target: Any) -> bool:
    try:
        if target in _BUILTIN_CONVERTERS or target in _CONTAINER_ORIGINS:
            return True
    except TypeError:
        return False
    return get_origin(target) in _CONTAINER_ORIGINS


def register_converter(target: Any, func: Converter) -> None:
    """Register *func* as the converter ``to(target, value)`` will use.

    *func* takes the source value and returns an instance of *target*.
    Only new targets can be added: the built-in rules and the container
    targets are fixed.  Re-registering a caller-added target replaces it
    and is logged as a warning.

    Example::

        register_converter(Decimal, lambda v: Decimal(to(str, v).strip()))
        to(list[Decimal], ["1.5", "2"])

    Raises:
        UnsupportedConversionError: If *target* has a built-in rule, is a
            container target, or is unhashable.
    """
    if _is_reserved(target):
        raise UnsupportedConversionError(
            f"Cannot replace the built-in converter for target {_type_name(target)}"
        )
    try:
        replacing = target in _REGISTERED
    except TypeError:
        raise UnsupportedConversionError(
            f"Target {_type_name(target)} is unhashable and cannot be registered"
        ) from None
    if replacing:
        logger.warning("Replacing converter for target %s", _type_name(target))
    else:
        logger.debug("Registering converter for target %s", _type_name(target))
    _REGISTERED[target] = func


def _container_converter(origin: type, args: tuple[Any, ...], target: Any) -> Converter:
    """Build the element-wise converter for a container target."""
    if origin is list:
        (element_type,) = args or (Any,)
        return lambda value: to_list(element_type, value, to)

    if origin is dict:
        key_type, value_type = args or (Any, Any)
        return lambda value: to_dict(key_type, value_type, value, to)

    # tuple: bare, variadic tuple[T, ...], or pair tuple[T1, T2]
    if not args:
        return lambda value: to_tuple(Any, value, to)
    if len(args) == 2 and args[1] is Ellipsis:
        element_type = args[0]
        return lambda value: to_tuple(element_type, value, to)
    if len(args) == 2:
        first_type, second_type = args
        return lambda value: to_pair(first_type, second_type, value, to)
    raise UnsupportedConversionError(
        f"Unsupported tuple target {target!r}: only pairs tuple[T1, T2] "
        "and variadic tuple[T, ...] are supported"
    )


def converter_for(target: Any) -> Converter:
    """Return the one-argument converter that ``to(target, ...)`` would apply.

    Raises:
        UnsupportedConversionError: If no rule exists for *target*.
    """
    origin = get_origin(target)
    if origin is None and target in _CONTAINER_ORIGINS:
        return _container_converter(_CONTAINER_ORIGINS[target], (), target)
    if origin in _CONTAINER_ORIGINS:
        return _container_converter(_CONTAINER_ORIGINS[origin], get_args(target), target)

    try:
        if target in _BUILTIN_CONVERTERS:
            return _BUILTIN_CONVERTERS[target]
        return _REGISTERED[target]
    except (KeyError, TypeError):
        # TypeError: unhashable target objects can never be registered
        raise UnsupportedConversionError(
            f"No converter registered for target {_type_name(target)}"
        ) from None


def to(target: Any, value: Any) -> Any:
    """Convert *value* to the type *target*.

    Args:
        target: The type to produce -- a scalar type (``int``, ``np.uint8``,
            ``str``, ...) or a container alias (``list[int]``,
            ``tuple[str, float]``, ``dict[str, int]``).
        value: A number, ``str``/``bytes`` text, or a tuple/list/dict.

    Returns:
        The converted value.

    Raises:
        EmptyInputError: Numeric conversion of blank text.
        EmbeddedWhitespaceError: Numeric literal with inner whitespace.
        InvalidLiteralError: Text that is not a literal in the selected base.
        TranscodingError: Text that cannot be encoded/decoded.
        UnsupportedConversionError: No rule for this target/source combination.
    """
    return converter_for(target)(value)
