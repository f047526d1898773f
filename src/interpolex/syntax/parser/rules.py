"""Grammar rules for placeholder content.

Each rule receives the content of a placeholder with its braces already
stripped and returns the raw (un-normalized) AST node. Whitespace is kept;
the normalize pass trims it afterwards.

Only the first occurrence of each delimiter is significant:

- ``key:type`` splits at the first ``:``; further colons belong to the type
- ``key?`` splits at the first ``?``; text after it is discarded
- ``key:forms`` splits at the first ``:``; further colons belong to the forms
- ``case: value`` splits at the first ``:``; further colons belong to the value

Python 3.13+.
"""

import logging

from interpolex.constants import (
    ESCAPE_PLACEHOLDER,
    ESCAPED_COMMA,
    PLURAL_FORMS,
    PLURAL_LAYOUTS,
    UNKNOWN_TYPE,
)
from interpolex.diagnostics import ErrorTemplate, PluralKeyMissingError, SourceSpan
from interpolex.syntax.ast import (
    FormatterPart,
    ParameterPart,
    PluralPart,
    SwitchCaseBranch,
    SwitchCasePart,
    TransformPart,
)

__all__ = [
    "parse_parameter",
    "parse_plural",
    "parse_switch_case",
    "parse_transform",
]

logger = logging.getLogger(__name__)


# ============================================================================
# PARAMETERS
# ============================================================================


def parse_parameter(content: str) -> ParameterPart:
    """Parse parameter content such as ``name?:string|upper|{a: b}``.

    Args:
        content: Placeholder content without its outer braces

    Returns:
        Raw ParameterPart (not yet normalized)
    """
    head, *transform_sources = content.split("|")

    key_spec, has_type, type_annotation = head.partition(":")
    key, has_marker, marker_rest = key_spec.partition("?")

    return ParameterPart(
        key=key,
        type=type_annotation if has_type else UNKNOWN_TYPE,
        optional=bool(has_marker) and marker_rest == "",
        transforms=tuple(parse_transform(source) for source in transform_sources),
    )


def parse_transform(source: str) -> TransformPart:
    """Parse one ``|``-separated transform expression.

    A transform wrapped in a single pair of braces is a switch-case;
    anything else names a formatter.

    Args:
        source: Transform text between pipes

    Returns:
        SwitchCasePart or FormatterPart
    """
    text = source.strip()
    if len(text) >= 2 and text.startswith("{") and text.endswith("}"):
        return SwitchCasePart(cases=parse_switch_case(text[1:-1]), raw=text)
    return FormatterPart(name=text)


# ============================================================================
# SWITCH-CASES
# ============================================================================


def _escape_token(text: str) -> str:
    """Return a placeholder token that does not occur in ``text``."""
    token = ESCAPE_PLACEHOLDER
    while token in text:
        token += ESCAPE_PLACEHOLDER
    return token


def parse_switch_case(content: str) -> tuple[SwitchCaseBranch, ...]:
    """Parse switch-case content such as ``male: his, female: her, *: their``.

    ``\\,`` inside a branch is a literal comma rather than a separator.

    Args:
        content: Switch-case text without its outer braces

    Returns:
        Branches in declaration order. A branch without ``:`` has an empty
        value; a blank branch (trailing comma) has an empty key.
    """
    token = _escape_token(content)
    branches: list[SwitchCaseBranch] = []

    for branch in content.replace(ESCAPED_COMMA, token).split(","):
        key, _, value = branch.partition(":")
        branches.append(
            SwitchCaseBranch(
                key=key.strip().replace(token, ","),
                value=value.strip().replace(token, ","),
            )
        )

    return tuple(branches)


# ============================================================================
# PLURALS
# ============================================================================


def parse_plural(
    content: str,
    inherited_key: str,
    *,
    span: SourceSpan | None = None,
    source_line: str | None = None,
) -> tuple[PluralPart, str]:
    """Parse plural content such as ``count:zero|one|other``.

    Args:
        content: Plural group text without its double braces
        inherited_key: Count key established earlier in the template ("" if none)
        span: Location of the group, attached to diagnostics
        source_line: Template line containing the group, attached to diagnostics

    Returns:
        Tuple of (raw PluralPart, resolved count key). The key becomes the
        inherited key for later plural groups.

    Raises:
        PluralKeyMissingError: If the group has no key and none is inherited
    """
    key_source, has_key, forms_source = content.partition(":")
    if not has_key:
        key_source, forms_source = "", content

    key = key_source.strip() or inherited_key
    if not key:
        raise PluralKeyMissingError(
            ErrorTemplate.plural_key_missing(content, span, source_line)
        )

    values = forms_source.split("|")
    layout = PLURAL_LAYOUTS.get(len(values))

    if layout is None:
        diagnostic = ErrorTemplate.plural_form_count_unsupported(
            key, len(values), span, source_line
        )
        logger.warning("%s", diagnostic.format_error())
        layout = PLURAL_FORMS

    forms = dict(zip(layout, values, strict=False))
    forms.setdefault("other", "")
    return PluralPart(key=key, **forms), key
