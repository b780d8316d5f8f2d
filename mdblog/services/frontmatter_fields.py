"""
Typed access to the loosely-typed frontmatter bag.

Content authors write raw YAML, so nothing about a field's type is
guaranteed. Every read in the generators goes through ``resolve_field`` or
one of the guarded accessors below.
"""

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_string_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(
        isinstance(item, str) for item in value
    )


def is_finite_number(value: Any) -> bool:
    # bool is an int subclass; YAML "true" must not count as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value) and not math.isinf(value)


def is_author_object(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("name"), str)


def resolve_field(
    fields: Iterable[str], frontmatter: Any, fallback: Optional[T] = None
) -> Optional[T]:
    """
    Return the first present value among ``fields``, checked in order.

    ``None`` and ``""`` count as absent, so ``{"a": "", "b": "y"}`` resolves
    ``["a", "b"]`` to ``"y"``.
    """
    if not isinstance(frontmatter, Mapping):
        return fallback
    for field in fields:
        value = frontmatter.get(field)
        if value is not None and value != "":
            return value
    return fallback


def resolve_string(
    fields: Iterable[str], frontmatter: Any, fallback: Optional[str] = None
) -> Optional[str]:
    """Like ``resolve_field`` but skips values that are not non-empty strings."""
    if not isinstance(frontmatter, Mapping):
        return fallback
    for field in fields:
        value = frontmatter.get(field)
        if is_non_empty_string(value):
            return value
    return fallback


def get_number_field(
    frontmatter: Any, field: str, fallback: Optional[float] = None
) -> Optional[float]:
    value = frontmatter.get(field) if isinstance(frontmatter, Mapping) else None
    return value if is_finite_number(value) else fallback


def get_string_list_field(frontmatter: Any, field: str) -> List[str]:
    value = frontmatter.get(field) if isinstance(frontmatter, Mapping) else None
    return list(value) if is_string_array(value) else []
