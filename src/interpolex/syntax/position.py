"""Position utilities for template source text.

Converts character offsets to line/column positions for error reporting
and editor integration.
"""

from interpolex.diagnostics import SourceSpan

__all__ = ["column_offset", "line_content", "line_offset", "source_span"]


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete template text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> line_offset("line1\\nline2", 6)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete template text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> column_offset("hello\\nworld", 8)
        2
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def line_content(source: str, pos: int) -> str:
    """Return the line containing ``pos``, without its line ending."""
    pos = min(max(pos, 0), len(source))
    start = source.rfind("\n", 0, pos) + 1
    end = source.find("\n", pos)
    if end == -1:
        end = len(source)
    return source[start:end].removesuffix("\r")


def source_span(source: str, start: int, end: int) -> SourceSpan:
    """Build a 1-based SourceSpan for the region ``source[start:end]``."""
    return SourceSpan(
        start=start,
        end=end,
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )
