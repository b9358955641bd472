"""Emptiness predicates: is_zero, is_empty, and zero_of.

Usage:
    is_zero(0)            # True
    is_zero([])           # True, allocated-but-empty counts as zero
    is_zero((0, 0))       # True, tuples are zero when every element is
    is_empty((0, 0))      # False, tuples are empty only when length is 0
    zero_of(str)          # ""

Common builtin types are decided by a lookup keyed on ``type(value)``; only
values outside that table reach the classification registry. A value that
cannot be inspected is treated as non-zero; the only error that escapes is a
ValidationError from invalid ASK_* settings when the registry is first built.
"""

from __future__ import annotations

import logging
import operator
import typing
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from types import UnionType
from typing import Any, TypeVar, get_origin, get_type_hints

from ask.core.models import Kind
from ask.core.registry import KindRegistry, get_registry, is_pydantic_model

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _has_no_length(value: Any) -> bool:
    return len(value) == 0


def _equals_zero(value: Any) -> bool:
    # -0.0 == 0 and 0j == 0 hold, NaN == 0 does not.
    return bool(value == 0)


def _never(value: Any) -> bool:
    return False


def _always(value: Any) -> bool:
    return True


def _referent_gone(value: Any) -> bool:
    return value() is None


def _opaque_zero(value: Any) -> bool:
    tp = type(value)
    if hasattr(tp, "__bool__") or hasattr(tp, "__len__"):
        return not value
    return False


# Exact-type dispatch; subclasses fall through to the registry.
_ZERO_FAST_PATH: dict[type, Callable[[Any], bool]] = {
    bool: operator.not_,
    int: _equals_zero,
    float: _equals_zero,
    complex: _equals_zero,
    str: _has_no_length,
    bytes: _has_no_length,
    bytearray: _has_no_length,
    list: _has_no_length,
    dict: _has_no_length,
    set: _has_no_length,
    frozenset: _has_no_length,
}

_EMPTY_FAST_PATH: frozenset[type] = frozenset(
    {str, bytes, bytearray, list, tuple, dict, set, frozenset}
)

_ZERO_BY_KIND: dict[Kind, Callable[[Any], bool]] = {
    Kind.ABSENT: _always,
    Kind.BOOLEAN: operator.not_,
    Kind.NUMBER: _equals_zero,
    Kind.TEXT: _has_no_length,
    Kind.ERROR: _never,
    Kind.HANDLE: _never,
    Kind.REFERENCE: _referent_gone,
    Kind.CHANNEL: _never,
    Kind.SEQUENCE: _has_no_length,
    Kind.MAPPING: _has_no_length,
    Kind.OPAQUE: _opaque_zero,
}


def _zero_at(value: Any, depth: int, registry: KindRegistry) -> bool:
    if value is None:
        return True
    check = _ZERO_FAST_PATH.get(type(value))
    if check is not None:
        return check(value)
    if depth > registry.max_depth:
        return False

    kind = registry.kind_of(type(value))
    if kind is Kind.FIXED:
        return all(_zero_at(item, depth + 1, registry) for item in value)
    if kind is Kind.AGGREGATE:
        return all(
            _zero_at(getattr(value, name), depth + 1, registry)
            for name in registry.field_names(type(value))
        )
    return _ZERO_BY_KIND[kind](value)


def _inspection_failed(predicate: str, value: Any) -> bool:
    logger.debug(
        "%s could not inspect %s, treating it as non-zero",
        predicate,
        type(value).__qualname__,
        exc_info=True,
    )
    return False


def is_zero(value: Any) -> bool:
    """Check if a value is the zero value for its type.

    - None is zero.
    - bool, numbers: False / == 0. -0.0 is zero, NaN is not.
    - str, bytes, lists, sets, dicts and other sized containers: length 0.
    - Exceptions: never zero, even with an empty message.
    - Functions, classes, modules, queues: never zero.
    - weakref.ref: zero once the referent is collected.
    - Tuples, dataclasses, Pydantic models: every element/field is zero.
    - Anything else: ``not value`` if the type defines ``__bool__`` or
      ``__len__``, otherwise non-zero.

    Args:
        value: Any value.

    Returns:
        True if value is zero. False if it is not, or if inspecting it failed.

    Raises:
        pydantic.ValidationError: If the ASK_* settings are invalid. They are
            loaded on the first call that reaches the registry.

    Note:
        Each failed inspection is logged at DEBUG on the
        ``ask.core.predicates`` logger with the traceback attached. That is the
        only log output of this module, and no handlers are installed.
    """
    if value is None:
        return True
    check = _ZERO_FAST_PATH.get(type(value))
    if check is not None:
        return check(value)
    registry = get_registry()
    try:
        return _zero_at(value, 0, registry)
    except Exception:
        return _inspection_failed("is_zero", value)


def is_empty(value: Any) -> bool:
    """Check if a value is empty.

    Containers are empty when their length is 0, whatever they hold: unlike
    is_zero, ``is_empty((0, 0))`` is False. Queues are empty when
    ``qsize() == 0``. For every other value is_empty agrees with is_zero.

    Args:
        value: Any value.

    Returns:
        True if value is empty. False if it is not, or if inspecting it failed.
    """
    if value is None:
        return True
    if type(value) in _EMPTY_FAST_PATH:
        return len(value) == 0
    registry = get_registry()
    try:
        kind = registry.kind_of(type(value))
        if kind.is_container:
            return len(value) == 0
        if kind is Kind.CHANNEL:
            return bool(value.qsize() == 0)
        return _zero_at(value, 0, registry)
    except Exception:
        return _inspection_failed("is_empty", value)


def zero_of(tp: type[T] | None) -> T | None:
    """Build the zero value of a type.

    Args:
        tp: The type. Parameterized generics such as ``list[int]`` use their
            origin; ``X | None`` and other unions give None.

    Returns:
        ``tp()`` for types whose no-argument constructor gives their zero
        (bool, numbers, str, bytes, containers). Dataclasses, NamedTuples and
        Pydantic models are built from the zero of each field annotation.
        None for anything else, including types that fail to build.
    """
    return _zero_of(tp, 0, get_registry().max_depth)


def _zero_of(tp: Any, depth: int, max_depth: int) -> Any:
    if tp is None or tp is type(None) or depth > max_depth:
        return None
    origin = get_origin(tp)
    if origin is not None:
        if origin is typing.Union or origin is UnionType:
            return None
        tp = origin
    if not isinstance(tp, type):
        return None

    try:
        if is_dataclass(tp):
            hints = get_type_hints(tp)
            return tp(
                **{
                    f.name: _zero_of(hints.get(f.name), depth + 1, max_depth)
                    for f in fields(tp)
                    if f.init
                }
            )
        if issubclass(tp, tuple) and hasattr(tp, "_fields"):
            hints = get_type_hints(tp)
            return tp(*(_zero_of(hints.get(name), depth + 1, max_depth) for name in tp._fields))
        if is_pydantic_model(tp):
            return tp.model_construct(  # type: ignore[attr-defined]
                **{
                    name: _zero_of(info.annotation, depth + 1, max_depth)
                    for name, info in tp.model_fields.items()  # type: ignore[attr-defined]
                }
            )
        return tp()
    except Exception:
        logger.debug("Could not build zero value of %r", tp, exc_info=True)
        return None
