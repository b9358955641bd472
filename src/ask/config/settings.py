"""Configuration settings using Pydantic Settings.

Usage:
    from ask.config import AskSettings, get_settings

    # Load from environment variables (ASK_*)
    settings = get_settings()

    # Or override with explicit values
    settings = AskSettings(max_depth=8, type_cache_size=0)
"""

from __future__ import annotations

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AskSettings(BaseSettings):  # type: ignore[misc]
    """Limits for the reflective inspection path.

    Attributes:
        max_depth: Deepest nesting of tuples and aggregates inspected for
            structural zero. Anything nested deeper counts as non-zero.
        type_cache_size: Number of types whose classification and field
            names are memoized. Types past the bound are classified on
            every call.

    Environment Variables:
        ASK_MAX_DEPTH
        ASK_TYPE_CACHE_SIZE
    """

    model_config = SettingsConfigDict(
        env_prefix="ASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int = Field(default=32, ge=1)
    type_cache_size: int = Field(default=4096, ge=0)


@cache
def get_settings() -> AskSettings:
    """Load settings once per process.

    Returns:
        The cached AskSettings instance. Call ``get_settings.cache_clear()``
        to reload after the environment changes.
    """
    return AskSettings()
