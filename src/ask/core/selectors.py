"""Value selectors built on is_zero.

Usage:
    status = if_(user.is_active, "online", "offline")
    email = ifelse(user.email, "not set")
    name = coalesce(user.nickname, user.full_name, "anonymous")

Every argument is evaluated before the call. For lazy branches pass
callables and invoke the one that comes back:

    compute = if_(cached, lambda: cached, expensive_lookup)
    value = compute()
"""

from __future__ import annotations

from typing import TypeVar

from ask.core.predicates import is_zero, zero_of

T = TypeVar("T")


def if_(condition: object, true_val: T, false_val: T) -> T:
    """Pick one of two values, like a ternary operator.

    - bool condition: true_val if True.
    - Exception condition: true_val, since an error being present means the
      condition fired. Pass None for "no error".
    - Anything else: true_val if the condition is not zero.

    Args:
        condition: Value deciding which branch is returned.
        true_val: Returned when the condition holds.
        false_val: Returned otherwise.

    Returns:
        true_val or false_val.
    """
    if isinstance(condition, bool):
        return true_val if condition else false_val
    if isinstance(condition, BaseException):
        return true_val
    return false_val if is_zero(condition) else true_val


def ifelse(value: T, default_val: T) -> T:
    """Return value unless it is zero, in which case return default_val.

    Args:
        value: Preferred value.
        default_val: Fallback when value is zero.

    Returns:
        value if it is not zero, default_val otherwise.
    """
    if not is_zero(value):
        return value
    return default_val


def default(value: T, default_val: T) -> T:
    """Alias of ifelse for call sites where "default" reads better."""
    return ifelse(value, default_val)


def coalesce(*values: T, kind: type[T] | None = None) -> T:
    """Return the first value that is not zero, like SQL COALESCE.

    Values are scanned left to right and the scan stops at the first
    non-zero one.

    Args:
        *values: Candidates in priority order.
        kind: Type whose zero is returned when every candidate is zero.
            Without it the last candidate that is not None is returned, since
            it is itself a zero of the shared type.

    Returns:
        The first non-zero value. Otherwise ``zero_of(kind)`` when kind is
        given, else the last candidate that is not None, else None.

    Example:
        >>> coalesce("", "", "hello", "world")
        'hello'
        >>> coalesce(kind=str)
        ''
    """
    for value in values:
        if not is_zero(value):
            return value
    if kind is not None:
        return zero_of(kind)  # type: ignore[return-value]
    for value in reversed(values):
        if value is not None:
            return value
    return None  # type: ignore[return-value]
