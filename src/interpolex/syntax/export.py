"""Plain-data export of parsed templates.

Converts the AST into JSON-ready dicts and lists, tagged with ``kind``
discriminators. Rendering engines that are not written in Python consume
this form; absent plural forms are omitted.

Example:
    >>> to_plain(parse("{count:number} item{{s}}"))
    [{'kind': 'parameter', 'key': 'count', 'type': 'number', 'optional': False,
      'transforms': []},
     {'kind': 'text', 'content': ' item'},
     {'kind': 'plural', 'key': 'count', 'other': 's'}]

Python 3.13+.
"""

from typing import Any, assert_never

from .ast import (
    FormatterPart,
    MessagePart,
    ParameterPart,
    ParsedMessage,
    PluralPart,
    SwitchCasePart,
    TextPart,
    TransformPart,
)

__all__ = ["to_plain"]


def _transform_to_plain(transform: TransformPart) -> dict[str, Any]:
    match transform:
        case FormatterPart(name=name):
            return {"kind": str(transform.kind), "name": name}
        case SwitchCasePart(cases=cases, raw=raw):
            return {
                "kind": str(transform.kind),
                "cases": [{"key": c.key, "value": c.value} for c in cases],
                "raw": raw,
            }
        case _:
            assert_never(transform)


def _part_to_plain(part: MessagePart) -> dict[str, Any]:
    match part:
        case TextPart(content=content):
            return {"kind": str(part.kind), "content": content}
        case ParameterPart():
            return {
                "kind": str(part.kind),
                "key": part.key,
                "type": part.type,
                "optional": part.optional,
                "transforms": [_transform_to_plain(t) for t in part.transforms],
            }
        case PluralPart():
            return {"kind": str(part.kind), "key": part.key, **part.forms}
        case _:
            assert_never(part)


def to_plain(message: ParsedMessage) -> list[dict[str, Any]]:
    """Convert a parsed template to a list of plain dicts.

    Args:
        message: Parsed template parts

    Returns:
        One dict per part, in source order
    """
    return [_part_to_plain(part) for part in message]
