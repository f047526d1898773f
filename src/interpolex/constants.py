"""Shared constants for Interpolex.

Centralized configuration constants used across the syntax, diagnostics and
introspection packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Type annotations: Sentinel and numeric type names
- Grammar limits: Bracket nesting depth
- Input limits: DoS prevention via size constraints
- Plural forms: Canonical count-form order

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type annotations
    "UNKNOWN_TYPE",
    "NUMBER_TYPE",
    "DEFAULT_NUMERIC_TYPES",
    # Grammar limits
    "MAX_BRACE_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Plural forms
    "PLURAL_FORMS",
    "PLURAL_LAYOUTS",
    # Switch-case escaping
    "ESCAPED_COMMA",
    "ESCAPE_PLACEHOLDER",
]

# ============================================================================
# TYPE ANNOTATIONS
# ============================================================================

# Type reported for parameters written without a ``:type`` annotation.
UNKNOWN_TYPE: str = "unknown"

# Parameters annotated with a numeric type establish the count key that
# later plural groups without an explicit key inherit.
NUMBER_TYPE: str = "number"

DEFAULT_NUMERIC_TYPES: frozenset[str] = frozenset({NUMBER_TYPE})

# ============================================================================
# GRAMMAR LIMITS
# ============================================================================

# Outer placeholder braces plus one nested level. ``{{count:s}}`` (plural) and
# ``{choice|{a: b}}`` (switch-case) both need exactly two levels.
MAX_BRACE_DEPTH: int = 2

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum template length in characters (1 million).
# Templates are single messages; anything this large is not hand-authored.
MAX_SOURCE_SIZE: int = 1_000_000

# ============================================================================
# PLURAL FORMS
# ============================================================================

PLURAL_FORMS: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Positional layouts keyed by the number of ``|``-separated values.
# Value lists of any other length fall back to the 6-value layout.
PLURAL_LAYOUTS: dict[int, tuple[str, ...]] = {
    1: ("other",),
    2: ("one", "other"),
    3: ("zero", "one", "other"),
    6: PLURAL_FORMS,
}

# ============================================================================
# SWITCH-CASE ESCAPING
# ============================================================================

ESCAPED_COMMA: str = "\\,"

# Private-use code point; repeated until it does not occur in the input.
ESCAPE_PLACEHOLDER: str = "\ue000"
