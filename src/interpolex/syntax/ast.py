"""Template AST (Abstract Syntax Tree) node definitions.

A parsed template is a flat, ordered tuple of message parts. Parameters
carry a nested tuple of transforms. Every node is a frozen, slotted
dataclass, so a parse result is immutable and comparable by value.

Includes type guards as static methods for narrowing in tooling code.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from interpolex.constants import PLURAL_FORMS, UNKNOWN_TYPE
from interpolex.enums import PartKind, TransformKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message parts
    "TextPart",
    "ParameterPart",
    "PluralPart",
    # Transforms
    "FormatterPart",
    "SwitchCasePart",
    "SwitchCaseBranch",
    # Type aliases
    "MessagePart",
    "TransformPart",
    "ParsedMessage",
    "ASTNode",
]

# ============================================================================
# TRANSFORMS
# ============================================================================


@dataclass(frozen=True, slots=True)
class FormatterPart:
    """Named formatter applied to a parameter value.

    The name is opaque; the rendering engine resolves it.

    Example:
        { name|uppercase }  → FormatterPart(name="uppercase")
    """

    name: str

    kind: ClassVar[TransformKind] = TransformKind.FORMATTER

    @staticmethod
    def guard(node: object) -> TypeIs["FormatterPart"]:
        """Type guard for FormatterPart."""
        return isinstance(node, FormatterPart)


@dataclass(frozen=True, slots=True)
class SwitchCaseBranch:
    """One ``key: value`` branch of a switch-case.

    The default branch is conventionally keyed ``*``. Keys are not checked
    for uniqueness.
    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class SwitchCasePart:
    """Inline switch-case mapping discrete values to replacement text.

    Attributes:
        cases: Branches in declaration order
        raw: Original transform text, braces included (for diagnostics)

    Example:
        { gender|{ male: his, female: her, *: their } }
    """

    cases: tuple[SwitchCaseBranch, ...]
    raw: str

    kind: ClassVar[TransformKind] = TransformKind.SWITCH_CASE

    @staticmethod
    def guard(node: object) -> TypeIs["SwitchCasePart"]:
        """Type guard for SwitchCasePart."""
        return isinstance(node, SwitchCasePart)


# ============================================================================
# MESSAGE PARTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextPart:
    """Literal text, kept verbatim (surrounding whitespace included)."""

    content: str

    kind: ClassVar[PartKind] = PartKind.TEXT

    @staticmethod
    def guard(node: object) -> TypeIs["TextPart"]:
        """Type guard for TextPart."""
        return isinstance(node, TextPart)


@dataclass(frozen=True, slots=True)
class ParameterPart:
    """Placeholder bound to a runtime value by key.

    Attributes:
        key: Binding key
        type: Declared type, or ``"unknown"`` when unannotated
        optional: Whether the key was marked with ``?``
        transforms: Formatters and switch-cases in declaration order

    Example:
        { name?:string|upper }
        → ParameterPart(key="name", type="string", optional=True,
                        transforms=(FormatterPart(name="upper"),))
    """

    key: str
    type: str = UNKNOWN_TYPE
    optional: bool = False
    transforms: tuple["TransformPart", ...] = ()

    kind: ClassVar[PartKind] = PartKind.PARAMETER

    @staticmethod
    def guard(node: object) -> TypeIs["ParameterPart"]:
        """Type guard for ParameterPart."""
        return isinstance(node, ParameterPart)


@dataclass(frozen=True, slots=True)
class PluralPart:
    """Count-dependent text selected by the value bound to ``key``.

    ``other`` is the only mandatory form and may legitimately be empty
    (``weitere{{s|}}`` renders nothing for counts other than one).

    Example:
        {{count:no items|an item|?? items}}
        → PluralPart(key="count", zero="no items", one="an item", other="?? items")
    """

    key: str
    other: str
    zero: str | None = None
    one: str | None = None
    two: str | None = None
    few: str | None = None
    many: str | None = None

    kind: ClassVar[PartKind] = PartKind.PLURAL

    @property
    def forms(self) -> dict[str, str]:
        """Populated count forms in canonical order (zero → other)."""
        forms: dict[str, str] = {}
        for name in PLURAL_FORMS:
            value = getattr(self, name)
            if value is not None:
                forms[name] = value
        return forms

    @staticmethod
    def guard(node: object) -> TypeIs["PluralPart"]:
        """Type guard for PluralPart."""
        return isinstance(node, PluralPart)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type TransformPart = FormatterPart | SwitchCasePart
type MessagePart = TextPart | ParameterPart | PluralPart
type ParsedMessage = tuple[MessagePart, ...]
type ASTNode = MessagePart | TransformPart | SwitchCaseBranch
