"""Core functionalities: emptiness predicates and the selectors built on them.

Architecture Note:
    core/ is pure and stateless apart from the per-type classification cache
    in registry.py, which only ever memoizes.
"""

from ask.core.models import Kind
from ask.core.predicates import is_empty, is_zero, zero_of
from ask.core.registry import (
    KindRegistry,
    classify,
    get_registry,
    is_pydantic_model,
    reset_registry,
)
from ask.core.selectors import coalesce, default, if_, ifelse

__all__ = [
    # Models
    "Kind",
    # Predicates
    "is_zero",
    "is_empty",
    "zero_of",
    # Selectors
    "if_",
    "ifelse",
    "default",
    "coalesce",
    # Registry
    "KindRegistry",
    "classify",
    "get_registry",
    "reset_registry",
    "is_pydantic_model",
]
