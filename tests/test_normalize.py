"""Normalize pass tests: trimming, pruning, allow-lists, idempotence."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from interpolex import PluralKeyMissingError
from interpolex.syntax import parse
from interpolex.syntax.ast import (
    FormatterPart,
    ParameterPart,
    PluralPart,
    SwitchCaseBranch,
    SwitchCasePart,
    TextPart,
)
from interpolex.syntax.normalize import normalize
from tests.strategies import chaos_templates


class TestNormalizeValues:
    """Leaf and container handling."""

    def test_string_is_stripped(self) -> None:
        assert normalize("  a b  ") == "a b"

    def test_tuple_drops_empty_items(self) -> None:
        assert normalize((" a ", "", "  ", "b")) == ("a", "b")

    def test_non_string_leaf_is_unchanged(self) -> None:
        assert normalize(False) is False
        assert normalize(3) == 3

    def test_text_part_is_literal(self) -> None:
        part = TextPart("  padded  ")
        assert normalize(part) is part

    def test_empty_text_part_is_dropped(self) -> None:
        assert normalize(TextPart("")) is None


class TestNormalizeNodes:
    """Field-level pruning on AST dataclasses."""

    def test_parameter_fields_are_trimmed(self) -> None:
        raw = ParameterPart(
            key=" name ",
            type=" string ",
            optional=True,
            transforms=(FormatterPart(" upper "),),
        )
        assert normalize(raw) == ParameterPart(
            key="name", type="string", optional=True, transforms=(FormatterPart("upper"),)
        )

    def test_blank_type_falls_back_to_default(self) -> None:
        assert normalize(ParameterPart(key="n", type="  ")) == ParameterPart(key="n")

    def test_blank_key_drops_node(self) -> None:
        assert normalize(ParameterPart(key="  ")) is None

    def test_blank_formatters_are_removed_from_chain(self) -> None:
        raw = ParameterPart(key="n", transforms=(FormatterPart(""), FormatterPart(" ")))
        assert normalize(raw) == ParameterPart(key="n", transforms=())

    def test_optional_plural_forms_become_none(self) -> None:
        raw = PluralPart(key="n", zero=" ", one=" one ", other="x")
        assert normalize(raw, ("other",)) == PluralPart(key="n", one="one", other="x")

    def test_other_is_allow_listed(self) -> None:
        assert normalize(PluralPart(key="n", other="  "), ("other",)) == PluralPart(
            key="n", other=""
        )

    def test_other_without_allow_list_drops_node(self) -> None:
        assert normalize(PluralPart(key="n", other="")) is None

    def test_allow_list_reaches_nested_nodes(self) -> None:
        raw = ParameterPart(
            key="g",
            transforms=(
                SwitchCasePart(
                    cases=(SwitchCaseBranch(" a ", " "), SwitchCaseBranch("", "x")),
                    raw="{a: , : x}",
                ),
            ),
        )
        normalized = normalize(raw, ("value",))
        assert normalized == ParameterPart(
            key="g",
            transforms=(
                SwitchCasePart(cases=(SwitchCaseBranch("a", ""),), raw="{a: , : x}"),
            ),
        )

    def test_empty_value_without_allow_list_drops_branch(self) -> None:
        raw = SwitchCasePart(cases=(SwitchCaseBranch("a", ""),), raw="{a:}")
        assert normalize(raw) == SwitchCasePart(cases=(), raw="{a:}")


class TestNormalizeIdempotence:
    """normalize(normalize(x)) == normalize(x)."""

    def test_parsed_parts_are_fixed_points(self) -> None:
        message = parse("{count:number} weitere{{s|}} {g|{ a: , *: b }|upper} x")
        for part in message:
            allow = ("other",) if isinstance(part, PluralPart) else ("value",)
            assert normalize(part, allow) == part

    @given(source=chaos_templates(), allow=st.sampled_from([(), ("other",), ("value",)]))
    def test_normalize_is_idempotent(self, source: str, allow: tuple[str, ...]) -> None:
        try:
            message = parse(source)
        except PluralKeyMissingError:
            return
        for part in message:
            once = normalize(part, allow)
            assert normalize(once, allow) == once
