"""Configuration module using Pydantic Settings.

Provides the inspection limits used by the fallback path of the predicates.

Usage:
    from ask.config import AskSettings, get_settings

    settings = get_settings()  # ASK_* environment variables, then defaults
    settings = AskSettings(max_depth=8)
"""

from ask.config.settings import AskSettings, get_settings

__all__ = [
    "AskSettings",
    "get_settings",
]
