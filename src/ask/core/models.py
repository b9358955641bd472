"""Classification of runtime values for the emptiness predicates."""

from __future__ import annotations

from enum import Enum, auto


class Kind(Enum):
    """How a value's type decides whether the value is zero."""

    ABSENT = auto()  # None
    BOOLEAN = auto()  # Zero iff False
    NUMBER = auto()  # Zero iff == 0
    TEXT = auto()  # str/bytes family, zero iff length 0
    ERROR = auto()  # Exception instance, never zero
    HANDLE = auto()  # Function, class, module: always refers to something
    REFERENCE = auto()  # weakref, zero iff the referent is gone
    CHANNEL = auto()  # Queue, never zero, empty iff qsize() == 0
    SEQUENCE = auto()  # Dynamically sized sequence or set, zero iff length 0
    FIXED = auto()  # Tuple, zero iff every element is zero
    MAPPING = auto()  # Zero iff no entries
    AGGREGATE = auto()  # Dataclass or Pydantic model, zero iff every field is zero
    OPAQUE = auto()  # Anything else: the type's own truthiness, if it has one

    @property
    def is_container(self) -> bool:
        """Whether emptiness of this kind is decided by length alone."""
        return self in _LENGTH_KINDS


_LENGTH_KINDS = frozenset({Kind.TEXT, Kind.SEQUENCE, Kind.FIXED, Kind.MAPPING})
