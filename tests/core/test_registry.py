"""Tests for value classification and the per-type cache."""

import array
import asyncio
import math
import queue
import weakref
from collections import Counter, deque
from dataclasses import dataclass
from decimal import Decimal
from functools import partial

import pytest
from pydantic import BaseModel, ValidationError

from ask import Kind, classify, coalesce, is_empty, is_zero
from ask.core import KindRegistry, get_registry, is_pydantic_model, reset_registry


@dataclass(slots=True)
class Slotted:
    a: int = 0
    b: str = ""


class Model(BaseModel):
    name: str = ""
    size: int = 0


class Plain:
    pass


@pytest.fixture
def registry():
    """Create a KindRegistry for testing."""
    return KindRegistry()


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, Kind.ABSENT),
        (True, Kind.BOOLEAN),
        (3, Kind.NUMBER),
        (2.5, Kind.NUMBER),
        (1j, Kind.NUMBER),
        (Decimal(1), Kind.NUMBER),
        ("text", Kind.TEXT),
        (b"raw", Kind.TEXT),
        (memoryview(b"raw"), Kind.TEXT),
        (ValueError("bad"), Kind.ERROR),
        (len, Kind.HANDLE),
        (Plain, Kind.HANDLE),
        (math, Kind.HANDLE),
        (partial(int, "1"), Kind.HANDLE),
        (weakref.ref(Plain), Kind.REFERENCE),
        (queue.Queue(), Kind.CHANNEL),
        (queue.SimpleQueue(), Kind.CHANNEL),
        (asyncio.Queue(), Kind.CHANNEL),
        ([1], Kind.SEQUENCE),
        ({1}, Kind.SEQUENCE),
        (deque(), Kind.SEQUENCE),
        (range(2), Kind.SEQUENCE),
        (array.array("i"), Kind.SEQUENCE),
        ((1, 2), Kind.FIXED),
        ({"a": 1}, Kind.MAPPING),
        (Counter(), Kind.MAPPING),
        (Slotted(), Kind.AGGREGATE),
        (Model(), Kind.AGGREGATE),
        (Plain(), Kind.OPAQUE),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_container_kinds():
    assert Kind.SEQUENCE.is_container
    assert Kind.FIXED.is_container
    assert Kind.MAPPING.is_container
    assert Kind.TEXT.is_container
    assert not Kind.CHANNEL.is_container
    assert not Kind.AGGREGATE.is_container


def test_kind_is_cached_per_type(registry):
    registry.kind_of(Slotted)
    registry.kind_of(Slotted)

    assert registry.cached_types() == frozenset({Slotted})


def test_cache_bound_stops_caching_but_still_classifies():
    registry = KindRegistry(type_cache_size=1)

    assert registry.kind_of(list) is Kind.SEQUENCE
    assert registry.kind_of(dict) is Kind.MAPPING
    assert registry.kind_of(dict) is Kind.MAPPING
    assert registry.cached_types() == frozenset({list})


def test_zero_cache_size_caches_nothing():
    registry = KindRegistry(type_cache_size=0)

    assert registry.kind_of(Plain) is Kind.OPAQUE
    assert registry.field_names(Slotted) == ("a", "b")
    assert registry.cached_types() == frozenset()


def test_field_names(registry):
    assert registry.field_names(Slotted) == ("a", "b")
    assert registry.field_names(Model) == ("name", "size")
    assert registry.field_names(Plain) == ()


def test_is_pydantic_model():
    assert is_pydantic_model(Model)
    assert not is_pydantic_model(Slotted)
    assert not is_pydantic_model(dict)


def test_global_registry_is_built_once(fresh_registry):
    assert get_registry() is get_registry()


def test_reset_registry_rereads_settings(fresh_registry, monkeypatch):
    assert get_registry().max_depth == 32

    monkeypatch.setenv("ASK_MAX_DEPTH", "5")
    monkeypatch.setenv("ASK_TYPE_CACHE_SIZE", "10")
    reset_registry()

    assert get_registry().max_depth == 5
    assert get_registry().type_cache_size == 10


def test_classification_failure_is_opaque(fresh_registry, monkeypatch):
    def broken(tp):
        raise TypeError("cannot classify")

    monkeypatch.setattr("ask.core.registry._classify_type", broken)

    assert classify(Plain()) is Kind.OPAQUE


@pytest.mark.parametrize(
    "call",
    [
        lambda: is_zero((0, 0)),
        lambda: is_empty(queue.Queue()),
        lambda: classify(Slotted()),
        lambda: coalesce("", "", kind=str),
    ],
    ids=["is_zero", "is_empty", "classify", "coalesce"],
)
def test_invalid_settings_are_reported(fresh_registry, monkeypatch, call):
    """A bad ASK_* value raises instead of turning into a wrong answer."""
    monkeypatch.setenv("ASK_MAX_DEPTH", "abc")

    with pytest.raises(ValidationError):
        call()
    with pytest.raises(ValidationError):
        call()


def test_fast_path_does_not_load_settings(fresh_registry, monkeypatch):
    monkeypatch.setenv("ASK_MAX_DEPTH", "abc")

    assert is_zero(0)
    assert is_empty([])
    assert coalesce("", "x") == "x"
