"""Trim and prune parsed template nodes.

The rule parsers keep raw slices of the template (whitespace included). This
pass runs once per placeholder and produces the canonical node:

- Strings are stripped.
- Tuples are normalized element-wise; elements that normalize to None or ""
  are removed (so a blank formatter disappears from a transform chain).
- A dataclass field that becomes "" is dropped unless its name is in the
  allow-list: it falls back to the field default (None for optional plural
  forms, "unknown" for a parameter type). A required field without a default
  drops the whole node (returns None).
- TextPart is literal and returned unchanged (None when empty).

The allow-list is passed down to nested nodes. Normalization is idempotent.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Collection
from dataclasses import MISSING, fields, is_dataclass, replace

from .ast import TextPart

__all__ = ["normalize"]


def normalize[T](node: T, allow_empty: Collection[str] = ()) -> T | None:
    """Return a trimmed copy of ``node`` with empty values pruned.

    Args:
        node: AST node, tuple of nodes, or string
        allow_empty: Field names that may keep an empty string value

    Returns:
        Normalized node, or None if a required field is empty
    """
    match node:
        case TextPart(content=content):
            return node if content else None
        case str():
            return node.strip()  # type: ignore[return-value]
        case tuple():
            items = (normalize(item, allow_empty) for item in node)
            return tuple(  # type: ignore[return-value]
                item for item in items if item is not None and item != ""
            )
        case _ if is_dataclass(node) and not isinstance(node, type):
            return _normalize_fields(node, allow_empty)
        case _:
            return node


def _normalize_fields[T](node: T, allow_empty: Collection[str]) -> T | None:
    """Normalize every field of a dataclass node."""
    changes: dict[str, object] = {}
    for field in fields(node):  # type: ignore[arg-type]
        value = getattr(node, field.name)
        if value is None:
            continue
        normalized = normalize(value, allow_empty)
        if normalized == "" and field.name not in allow_empty:
            if field.default is MISSING:
                return None
            normalized = field.default
        changes[field.name] = normalized
    return replace(node, **changes)  # type: ignore[type-var]
