"""Serialize a parsed template back to template syntax.

Converts AST nodes to template text. Useful for:
- Formatters (canonical placeholder spelling)
- Code generators and message extraction tools
- Property-based testing (roundtrip: parse → serialize → parse)

Plural groups are always written with an explicit count key, so the output
does not depend on key inheritance.

Python 3.13+.
"""

from typing import assert_never

from interpolex.constants import PLURAL_FORMS, PLURAL_LAYOUTS, UNKNOWN_TYPE

from .ast import (
    FormatterPart,
    MessagePart,
    ParameterPart,
    ParsedMessage,
    PluralPart,
    SwitchCaseBranch,
    SwitchCasePart,
    TextPart,
    TransformPart,
)

__all__ = ["SerializationValidationError", "serialize"]


class SerializationValidationError(ValueError):
    """Raised when an AST cannot be expressed in template syntax.

    Common causes:
    - Literal text containing braces (would be read back as a placeholder)
    - Keys, types or formatter names containing grammar delimiters
    - Plural forms containing '|'
    """


# Characters that terminate each token when the template is read back.
_KEY_DELIMITERS = frozenset("{}|:?")
_TYPE_DELIMITERS = frozenset("{}|")
_TRANSFORM_DELIMITERS = frozenset("{}|")
_FORM_DELIMITERS = frozenset("{}|")
_BRANCH_KEY_DELIMITERS = frozenset("{}|:,")
_BRANCH_VALUE_DELIMITERS = frozenset("{}|")


def _check(text: str, delimiters: frozenset[str], context: str) -> None:
    """Raise if ``text`` contains any of ``delimiters``."""
    found = sorted(delimiters.intersection(text))
    if found:
        msg = f"{context} {text!r} contains reserved character(s) {''.join(found)!r}"
        raise SerializationValidationError(msg)


def _validate_part(part: MessagePart) -> None:
    """Validate one message part for serialization."""
    match part:
        case TextPart():
            _check(part.content, frozenset("{}"), "Text")
        case ParameterPart():
            _check(part.key, _KEY_DELIMITERS, "Parameter key")
            _check(part.type, _TYPE_DELIMITERS, f"Type of parameter '{part.key}'")
            for transform in part.transforms:
                match transform:
                    case FormatterPart():
                        _check(transform.name, _TRANSFORM_DELIMITERS, "Formatter")
                    case SwitchCasePart():
                        for branch in transform.cases:
                            _check(branch.key, _BRANCH_KEY_DELIMITERS, "Switch-case key")
                            _check(branch.value, _BRANCH_VALUE_DELIMITERS, "Switch-case value")
                    case _:
                        assert_never(transform)
        case PluralPart():
            _check(part.key, _KEY_DELIMITERS, "Plural key")
            for name, value in part.forms.items():
                _check(value, _FORM_DELIMITERS, f"Plural form '{name}'")
        case _:
            assert_never(part)


def _serialize_branch(branch: SwitchCaseBranch) -> str:
    value = branch.value.replace(",", "\\,")
    return f"{branch.key}: {value}"


def _serialize_transform(transform: TransformPart) -> str:
    match transform:
        case FormatterPart():
            return transform.name
        case SwitchCasePart():
            if transform.raw:
                return transform.raw
            return "{ " + ", ".join(_serialize_branch(b) for b in transform.cases) + " }"
        case _:
            assert_never(transform)


def _plural_values(part: PluralPart) -> list[str]:
    """Pick the shortest positional layout that reproduces the populated forms."""
    populated = set(part.forms)
    for layout in PLURAL_LAYOUTS.values():
        if populated <= set(layout):
            return [getattr(part, name) or "" for name in layout]
    return [getattr(part, name) or "" for name in PLURAL_FORMS]


def _serialize_part(part: MessagePart) -> str:
    match part:
        case TextPart():
            return part.content
        case ParameterPart():
            head = part.key
            if part.optional:
                head += "?"
            if part.type != UNKNOWN_TYPE:
                head += f":{part.type}"
            return "{" + "|".join([head, *map(_serialize_transform, part.transforms)]) + "}"
        case PluralPart():
            return "{{" + part.key + ":" + "|".join(_plural_values(part)) + "}}"
        case _:
            assert_never(part)


def serialize(message: ParsedMessage, *, validate: bool = False) -> str:
    """Serialize a parsed template to template text.

    Pure function; thread-safe.

    Args:
        message: Parsed template parts
        validate: If True, check that every part can be read back unchanged
                 (default: False)

    Returns:
        Template text

    Raises:
        SerializationValidationError: If validate=True and the AST is not
            expressible in template syntax

    Example:
        >>> serialize((TextPart("Hi "), ParameterPart(key="name", type="string")))
        'Hi {name:string}'
    """
    if validate:
        for part in message:
            _validate_part(part)
    return "".join(_serialize_part(part) for part in message)
