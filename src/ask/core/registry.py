"""Per-type classification cache.

Classifying a type walks isinstance/ABC checks, so the result is memoized per
type rather than recomputed per value. Field names of aggregates are memoized
the same way so a structural zero check only reads attributes.

Usage:
    registry = get_registry()
    registry.kind_of(list)  # Kind.SEQUENCE
    registry.field_names(MyDataclass)  # ("x", "y")
"""

from __future__ import annotations

import array
import asyncio
import logging
import numbers
import queue
import types
import weakref
from collections.abc import Mapping, Sequence, Set
from dataclasses import fields, is_dataclass
from functools import partial
from typing import Any

from ask.config import AskSettings, get_settings
from ask.core.models import Kind

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray, memoryview)

_CHANNEL_TYPES = (queue.Queue, queue.SimpleQueue, asyncio.Queue)

_HANDLE_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    partial,
)


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _classify_type(tp: type) -> Kind:
    # Order matters: bool is a Number, str is a Sequence, tuple is a Sequence.
    if tp is type(None):
        return Kind.ABSENT
    if issubclass(tp, bool):
        return Kind.BOOLEAN
    if issubclass(tp, BaseException):
        return Kind.ERROR
    if issubclass(tp, numbers.Number):
        return Kind.NUMBER
    if issubclass(tp, _TEXT_TYPES):
        return Kind.TEXT
    if issubclass(tp, tuple):
        return Kind.FIXED
    if is_dataclass(tp) or is_pydantic_model(tp):
        return Kind.AGGREGATE
    if issubclass(tp, Mapping):
        return Kind.MAPPING
    if issubclass(tp, (Sequence, Set, array.array)):
        return Kind.SEQUENCE
    if issubclass(tp, _CHANNEL_TYPES):
        return Kind.CHANNEL
    if issubclass(tp, weakref.ref):
        return Kind.REFERENCE
    if issubclass(tp, _HANDLE_TYPES):
        return Kind.HANDLE
    return Kind.OPAQUE


def _aggregate_field_names(tp: type) -> tuple[str, ...]:
    if is_dataclass(tp):
        return tuple(f.name for f in fields(tp))
    if is_pydantic_model(tp):
        return tuple(tp.model_fields)  # type: ignore[attr-defined]
    return ()


class KindRegistry:
    """Process-local cache mapping types to their Kind and aggregate fields.

    Entries are computed on first sight of a type and never change afterwards.
    Once ``type_cache_size`` types are cached, new types are classified on
    every call instead of growing the cache.
    """

    def __init__(self, max_depth: int = 32, type_cache_size: int = 4096) -> None:
        """Initialize empty registry.

        Args:
            max_depth: Structural recursion limit used by the predicates.
            type_cache_size: Maximum number of types memoized per cache.
        """
        self.max_depth = max_depth
        self.type_cache_size = type_cache_size
        self._kinds: dict[type, Kind] = {}
        self._fields: dict[type, tuple[str, ...]] = {}

    @classmethod
    def from_settings(cls, settings: AskSettings) -> KindRegistry:
        """Build a registry using the limits from settings."""
        return cls(max_depth=settings.max_depth, type_cache_size=settings.type_cache_size)

    def kind_of(self, tp: type) -> Kind:
        """Classify a type.

        Args:
            tp: Runtime type of the inspected value.

        Returns:
            The Kind that decides how values of this type are checked.
        """
        kind = self._kinds.get(tp)
        if kind is None:
            kind = _classify_type(tp)
            if len(self._kinds) < self.type_cache_size:
                self._kinds[tp] = kind
        return kind

    def field_names(self, tp: type) -> tuple[str, ...]:
        """Get the field names read by a structural zero check.

        Args:
            tp: Dataclass or Pydantic model type.

        Returns:
            Field names in declaration order, empty for other types.
        """
        names = self._fields.get(tp)
        if names is None:
            names = _aggregate_field_names(tp)
            if len(self._fields) < self.type_cache_size:
                self._fields[tp] = names
        return names

    def cached_types(self) -> frozenset[type]:
        """Types whose classification is currently memoized."""
        return frozenset(self._kinds)


_registry: KindRegistry | None = None


def get_registry() -> KindRegistry:
    """Access the global registry, building it from settings on first use.

    Returns:
        The process-local KindRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = KindRegistry.from_settings(get_settings())
    return _registry


def reset_registry() -> None:
    """Drop the global registry and cached settings.

    The next ``get_registry()`` call rereads ``ASK_*`` settings.
    """
    global _registry
    _registry = None
    get_settings.cache_clear()


def classify(value: Any) -> Kind:
    """Classify a value by its runtime type.

    Args:
        value: Any value.

    Returns:
        The value's Kind. Types that cannot be classified are OPAQUE.

    Raises:
        pydantic.ValidationError: If the ASK_* settings are invalid.
    """
    if value is None:
        return Kind.ABSENT
    registry = get_registry()
    try:
        return registry.kind_of(type(value))
    except Exception:
        logger.debug("Could not classify %r, treating as opaque", type(value), exc_info=True)
        return Kind.OPAQUE
