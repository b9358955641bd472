"""Ask: one-expression conditionals and default values.

Usage:
    from ask import coalesce, if_, ifelse, is_zero

    port = ifelse(config.port, 8080)
    host = coalesce(os.environ.get("APP_HOST"), config.host, "localhost")
    label = if_(user.is_active, "online", "offline")
    is_zero([])  # True
"""

__version__ = "0.1.0"

# Predicates
from ask.core import (
    Kind,
    classify,
    is_empty,
    is_zero,
    zero_of,
)

# Selectors
from ask.core import (
    coalesce,
    default,
    if_,
    ifelse,
)

__all__ = [
    # Version
    "__version__",
    # Predicates
    "is_zero",
    "is_empty",
    "zero_of",
    "classify",
    "Kind",
    # Selectors
    "if_",
    "ifelse",
    "default",
    "coalesce",
]
