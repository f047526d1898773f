"""Split template text into literal and bracketed segments.

A bracketed segment is a ``{...}`` region that may contain at most one
balanced nested ``{...}`` level, which is what plural groups (``{{...}}``)
and inline switch-cases (``{key|{a: b}}``) need. Matching is leftmost-first:
an opening brace whose region cannot be closed within the depth limit is
literal text, and scanning resumes at the next ``{``.

Examples:
    "Hi {name}!"      → literal "Hi ", bracketed "{name}", literal "!"
    "{{{x}}}"         → literal "{", bracketed "{{x}}", literal "}"
    "a { b"           → literal "a { b"

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from interpolex.constants import MAX_BRACE_DEPTH
from interpolex.enums import SegmentKind

__all__ = ["Segment", "find_span_end", "segment"]


@dataclass(frozen=True, slots=True)
class Segment:
    """Raw region of template text.

    Attributes:
        kind: LITERAL or BRACKETED
        text: Region text (braces included for bracketed segments)
        start: Character offset of the region in the template
    """

    kind: SegmentKind
    text: str
    start: int

    @property
    def end(self) -> int:
        """Character offset one past the region."""
        return self.start + len(self.text)


def find_span_end(source: str, start: int, max_depth: int = MAX_BRACE_DEPTH) -> int | None:
    """Find the end of the bracketed region opening at ``start``.

    Args:
        source: Template text
        start: Offset of an opening ``{``
        max_depth: Maximum brace nesting depth, outer pair included

    Returns:
        Offset one past the matching ``}``, or None if the region exceeds
        ``max_depth`` or is never closed
    """
    depth = 0
    for pos in range(start, len(source)):
        char = source[pos]
        if char == "{":
            if depth == max_depth:
                return None
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos + 1
    return None


def segment(source: str) -> tuple[Segment, ...]:
    """Split template text into ordered literal and bracketed segments.

    Empty literal regions (between adjacent placeholders, or at either end)
    are never emitted. Any input is segmentable; unbalanced braces stay in
    literal segments.

    Args:
        source: Template text

    Returns:
        Segments in source order
    """
    segments: list[Segment] = []
    literal_start = 0
    pos = source.find("{")

    while pos != -1:
        end = find_span_end(source, pos)
        if end is None:
            pos = source.find("{", pos + 1)
            continue

        if pos > literal_start:
            segments.append(
                Segment(SegmentKind.LITERAL, source[literal_start:pos], literal_start)
            )
        segments.append(Segment(SegmentKind.BRACKETED, source[pos:end], pos))
        literal_start = end
        pos = source.find("{", end)

    if literal_start < len(source):
        segments.append(
            Segment(SegmentKind.LITERAL, source[literal_start:], literal_start)
        )

    return tuple(segments)
