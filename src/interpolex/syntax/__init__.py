"""Template syntax package.

Provides the parser, AST definitions, normalization, serialization and
plain-data export. Separate from introspection to keep the dependency
graph one-directional.

Python 3.13+.
"""

from .ast import (
    ASTNode,
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
from .export import to_plain
from .normalize import normalize
from .parser import TemplateParser
from .segmenter import Segment, segment
from .serializer import SerializationValidationError, serialize

__all__ = [
    "ASTNode",
    "FormatterPart",
    "MessagePart",
    "ParameterPart",
    "ParsedMessage",
    "PluralPart",
    "Segment",
    "SerializationValidationError",
    "SwitchCaseBranch",
    "SwitchCasePart",
    "TemplateParser",
    "TextPart",
    "TransformPart",
    "normalize",
    "parse",
    "segment",
    "serialize",
    "to_plain",
]


def parse(source: str) -> ParsedMessage:
    """Parse template text into AST.

    Convenience function for TemplateParser().parse().

    Args:
        source: Template text

    Returns:
        Tuple of message parts in source order

    Raises:
        PluralKeyMissingError: If a plural group has no resolvable count key

    Example:
        >>> from interpolex.syntax import parse
        >>> parse("Test{{count:s}}")
        (TextPart(content='Test'), PluralPart(key='count', other='s', zero=None, one=None, two=None, few=None, many=None))
    """
    parser = TemplateParser()
    return parser.parse(source)
