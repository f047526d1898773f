"""Core template parser implementation.

This module provides the TemplateParser class that orchestrates parsing of
template text into the AST defined in :mod:`interpolex.syntax.ast`.

Architecture:
    The parse is a single left-to-right fold over the segments produced by
    :func:`~interpolex.syntax.segmenter.segment`. Each bracketed segment is
    classified (:func:`classify_span`), parsed by a rule from
    :mod:`~interpolex.syntax.parser.rules`, and normalized
    (:func:`~interpolex.syntax.normalize.normalize`).

    The only state carried between segments is the inherited count key: the
    key of the most recent numeric parameter or plural group. It is passed
    into and returned from each step, so plural groups that omit their key
    must come after the placeholder that establishes it.

Security:
    Includes a configurable input size limit to bound work on untrusted
    template text.

See Also:
    - :mod:`interpolex.syntax.ast` - AST node type definitions
    - :mod:`interpolex.syntax.parser.rules` - Placeholder grammar rules
"""

import logging
from collections.abc import Iterable

from interpolex.constants import DEFAULT_NUMERIC_TYPES, MAX_SOURCE_SIZE
from interpolex.enums import SegmentKind, SpanKind
from interpolex.syntax.ast import MessagePart, ParsedMessage, TextPart
from interpolex.syntax.normalize import normalize
from interpolex.syntax.parser.rules import parse_parameter, parse_plural
from interpolex.syntax.position import line_content, source_span
from interpolex.syntax.segmenter import Segment, segment

__all__ = ["TemplateParser", "classify_span"]

logger = logging.getLogger(__name__)

# Normalizer allow-lists: fields that may legitimately stay empty.
_PLURAL_ALLOW_EMPTY = ("other",)
_PARAMETER_ALLOW_EMPTY = ("value",)


def _strip_outer(text: str) -> str:
    """Remove the first and last character (a brace pair)."""
    return text[1:-1]


def classify_span(text: str) -> tuple[SpanKind, str]:
    """Classify a bracketed segment and strip its braces.

    Args:
        text: Bracketed segment text, outer braces included

    Returns:
        Tuple of (kind, content). Plural content has both brace pairs
        removed; parameter content has the outer pair removed.

    Example:
        >>> classify_span("{{count:s}}")
        (<SpanKind.PLURAL: 'plural'>, 'count:s')
        >>> classify_span("{name}")
        (<SpanKind.PARAMETER: 'parameter'>, 'name')
    """
    content = _strip_outer(text)
    if content.startswith("{"):
        return SpanKind.PLURAL, _strip_outer(content)
    return SpanKind.PARAMETER, content


class TemplateParser:
    """Interpolation template parser.

    Design:
    - Immutable configuration; all parse state is local to parse()
    - Safe to share one instance between threads
    - Permissive: only an unresolvable plural count key is fatal

    Attributes:
        max_source_size: Maximum template length in characters (default: 1M)
        numeric_types: Parameter types that establish the inherited count key
    """

    __slots__ = ("_max_source_size", "_numeric_types")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        numeric_types: Iterable[str] | None = None,
    ) -> None:
        """Initialize parser with optional size limit and numeric types.

        Args:
            max_source_size: Maximum template length in characters.
                            Set to 0 to disable the limit (not recommended).
            numeric_types: Type annotations treated as numeric
                          (default: {"number"}).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._numeric_types = (
            frozenset(numeric_types) if numeric_types is not None else DEFAULT_NUMERIC_TYPES
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed template length in characters."""
        return self._max_source_size

    @property
    def numeric_types(self) -> frozenset[str]:
        """Parameter types that establish the inherited count key."""
        return self._numeric_types

    def parse(self, source: str) -> ParsedMessage:
        """Parse template text into an ordered tuple of message parts.

        Args:
            source: Template text

        Returns:
            Parts in source order: TextPart, ParameterPart and PluralPart

        Raises:
            ValueError: If source exceeds max_source_size
            PluralKeyMissingError: If a plural group has no explicit key and
                no earlier numeric parameter or plural group established one

        Example:
            >>> TemplateParser().parse("Hello {name}")
            (TextPart(content='Hello '), ParameterPart(key='name', type='unknown', ...))
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Template size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in TemplateParser constructor to increase limit."
            )
            raise ValueError(msg)

        parts: list[MessagePart] = []
        count_key = ""

        for seg in segment(source):
            part, count_key = self._parse_segment(source, seg, count_key)
            if part is not None:
                parts.append(part)

        logger.debug("Parsed template into %d parts", len(parts))
        return tuple(parts)

    def _parse_segment(
        self, source: str, seg: Segment, count_key: str
    ) -> tuple[MessagePart | None, str]:
        """Parse one segment, threading the inherited count key.

        Returns:
            Tuple of (part or None, count key for the next segment)
        """
        if seg.kind is SegmentKind.LITERAL:
            return normalize(TextPart(seg.text)), count_key

        kind, content = classify_span(seg.text)

        if kind is SpanKind.PLURAL:
            plural, count_key = parse_plural(
                content,
                count_key,
                span=source_span(source, seg.start, seg.end),
                source_line=line_content(source, seg.start),
            )
            return normalize(plural, _PLURAL_ALLOW_EMPTY), count_key

        parameter = normalize(parse_parameter(content), _PARAMETER_ALLOW_EMPTY)
        if parameter is None:
            # No key; keep the placeholder as literal text.
            return TextPart(seg.text), count_key
        if parameter.type in self._numeric_types:
            count_key = parameter.key
        return parameter, count_key

    def __repr__(self) -> str:
        return (
            f"TemplateParser(max_source_size={self._max_source_size}, "
            f"numeric_types={sorted(self._numeric_types)})"
        )
