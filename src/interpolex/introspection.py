"""Template introspection for parameter, plural and formatter extraction.

Answers the questions a message catalogue tool asks before rendering:
which keys must the caller bind, which formatters must the rendering engine
provide, and which switch-case values are handled.

Key features:
- Frozen dataclasses with slots for immutable, hashable results
- Pattern matching over the AST with exhaustiveness checks
- Accepts either template text or an already parsed message

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from interpolex.syntax import parse
from interpolex.syntax.ast import (
    FormatterPart,
    ParameterPart,
    ParsedMessage,
    PluralPart,
    SwitchCasePart,
    TextPart,
)

__all__ = [
    "ParameterInfo",
    "TemplateIntrospection",
    "extract_parameters",
    "introspect_template",
]


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Immutable metadata about one parameter placeholder."""

    key: str
    """Binding key."""

    type: str
    """Declared type ("unknown" when unannotated)."""

    optional: bool
    """Whether the placeholder was marked optional with '?'."""

    formatters: tuple[str, ...] = ()
    """Formatter names in application order."""

    switch_case_keys: tuple[str, ...] = ()
    """Switch-case branch keys in declaration order (all switch-cases)."""


@dataclass(frozen=True, slots=True)
class TemplateIntrospection:
    """Complete introspection result for a template.

    A key used by several placeholders appears once per placeholder in
    ``parameters``; the accessor methods deduplicate.
    """

    parameters: tuple[ParameterInfo, ...]
    """Parameter placeholders in source order."""

    plural_keys: frozenset[str]
    """Count keys of plural groups (explicit or inherited)."""

    has_switch_cases: bool
    """Whether any parameter uses an inline switch-case."""

    _parameter_keys: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_parameter_keys", frozenset(p.key for p in self.parameters)
        )

    @property
    def has_plurals(self) -> bool:
        """Whether the template contains plural groups."""
        return bool(self.plural_keys)

    def get_parameter_keys(self) -> frozenset[str]:
        """Get keys of all parameter placeholders."""
        return self._parameter_keys

    def get_required_keys(self) -> frozenset[str]:
        """Get keys a caller must bind to render the template.

        A key is required when at least one of its placeholders is not
        optional, or when it selects a plural form.
        """
        required = {p.key for p in self.parameters if not p.optional}
        return frozenset(required) | self.plural_keys

    def requires_parameter(self, key: str) -> bool:
        """Check whether ``key`` must be bound to render the template."""
        return key in self.get_required_keys()

    def get_formatter_names(self) -> frozenset[str]:
        """Get names of all formatters the rendering engine must provide."""
        return frozenset(name for p in self.parameters for name in p.formatters)


def _parameter_info(part: ParameterPart) -> ParameterInfo:
    formatters: list[str] = []
    switch_case_keys: list[str] = []
    for transform in part.transforms:
        match transform:
            case FormatterPart(name=name):
                formatters.append(name)
            case SwitchCasePart(cases=cases):
                switch_case_keys.extend(branch.key for branch in cases)
            case _:
                assert_never(transform)
    return ParameterInfo(
        key=part.key,
        type=part.type,
        optional=part.optional,
        formatters=tuple(formatters),
        switch_case_keys=tuple(switch_case_keys),
    )


def introspect_template(template: str | ParsedMessage) -> TemplateIntrospection:
    """Extract parameter and plural metadata from a template.

    Args:
        template: Template text or a parsed message

    Returns:
        TemplateIntrospection for the template

    Raises:
        PluralKeyMissingError: If ``template`` is text with an unresolvable plural

    Example:
        >>> info = introspect_template("{count:number} item{{s}} for {name?}")
        >>> sorted(info.get_required_keys())
        ['count']
    """
    message = parse(template) if isinstance(template, str) else template

    parameters: list[ParameterInfo] = []
    plural_keys: set[str] = set()
    has_switch_cases = False

    for part in message:
        match part:
            case TextPart():
                pass
            case ParameterPart():
                parameters.append(_parameter_info(part))
                has_switch_cases = has_switch_cases or any(
                    SwitchCasePart.guard(t) for t in part.transforms
                )
            case PluralPart(key=key):
                plural_keys.add(key)
            case _:
                assert_never(part)

    return TemplateIntrospection(
        parameters=tuple(parameters),
        plural_keys=frozenset(plural_keys),
        has_switch_cases=has_switch_cases,
    )


def extract_parameters(template: str | ParsedMessage) -> frozenset[str]:
    """Get every key referenced by a template (parameters and plural counts).

    Simplified API for the common case of listing the bindings a template
    can consume.

    Args:
        template: Template text or a parsed message

    Returns:
        Frozen set of keys
    """
    info = introspect_template(template)
    return info.get_parameter_keys() | info.plural_keys
