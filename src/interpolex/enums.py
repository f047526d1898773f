"""Enumerations for Interpolex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PartKind(StrEnum):
    """Discriminator for top-level message parts.

    StrEnum provides automatic string conversion: str(PartKind.TEXT) == "text"
    """

    TEXT = "text"
    """Literal text: Hello"""

    PARAMETER = "parameter"
    """Parameter placeholder: { name?:string|upper }"""

    PLURAL = "plural"
    """Plural group: {{ count:one|many }}"""


class TransformKind(StrEnum):
    """Discriminator for parameter transforms."""

    FORMATTER = "formatter"
    """Named formatter: { name|upper }"""

    SWITCH_CASE = "switch-case"
    """Inline switch-case: { gender|{ male: his, *: their } }"""


class SegmentKind(StrEnum):
    """Kind of raw region produced by the segmenter."""

    LITERAL = "literal"
    BRACKETED = "bracketed"


class SpanKind(StrEnum):
    """Classification of a bracketed region."""

    PARAMETER = "parameter"
    PLURAL = "plural"


__all__ = [
    "PartKind",
    "SegmentKind",
    "SpanKind",
    "TransformKind",
]
