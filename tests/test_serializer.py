"""Serializer tests: canonical spelling, plural layouts, validation."""

from __future__ import annotations

import pytest

from interpolex.syntax import parse, serialize
from interpolex.syntax.ast import (
    FormatterPart,
    ParameterPart,
    PluralPart,
    SwitchCaseBranch,
    SwitchCasePart,
    TextPart,
)
from interpolex.syntax.serializer import SerializationValidationError


class TestSerializeParameters:
    def test_key_only(self) -> None:
        assert serialize((ParameterPart(key="name"),)) == "{name}"

    def test_type_and_optional(self) -> None:
        part = ParameterPart(key="name", type="string", optional=True)
        assert serialize((part,)) == "{name?:string}"

    def test_transforms(self) -> None:
        part = ParameterPart(
            key="g",
            transforms=(
                FormatterPart("upper"),
                SwitchCasePart(cases=(SwitchCaseBranch("a", "b"),), raw="{a: b}"),
            ),
        )
        assert serialize((part,)) == "{g|upper|{a: b}}"

    def test_switch_case_rebuilt_without_raw(self) -> None:
        switch = SwitchCasePart(
            cases=(SwitchCaseBranch("yes", "a, b"), SwitchCaseBranch("*", "")),
            raw="",
        )
        part = ParameterPart(key="g", transforms=(switch,))
        assert serialize((part,)) == "{g|{ yes: a\\, b, *:  }}"

    def test_text_is_verbatim(self) -> None:
        message = (TextPart("Hi "), ParameterPart(key="n"), TextPart("!"))
        assert serialize(message) == "Hi {n}!"


class TestSerializePlurals:
    @pytest.mark.parametrize(
        ("part", "expected"),
        [
            (PluralPart(key="n", other="s"), "{{n:s}}"),
            (PluralPart(key="n", other=""), "{{n:}}"),
            (PluralPart(key="n", one="a", other="b"), "{{n:a|b}}"),
            (PluralPart(key="n", zero="z", other="b"), "{{n:z||b}}"),
            (PluralPart(key="n", two="t", other="o"), "{{n:||t|||o}}"),
        ],
    )
    def test_shortest_layout(self, part: PluralPart, expected: str) -> None:
        assert serialize((part,)) == expected

    def test_inherited_key_is_written_explicitly(self) -> None:
        message = parse("{count:number} item{{s}}")
        assert serialize(message) == "{count:number} item{{count:s}}"


class TestSerializeRoundtrip:
    @pytest.mark.parametrize(
        "source",
        [
            "Hello World",
            "Hi {name?:string|upper}!",
            "{gender|{ male: his, female: her, *: their }} profile",
            "{{count:no items|an item|?? items}}",
            "weitere{{n:s|}}",
            "{{n:z|o|t|f|m|x}}",
        ],
    )
    def test_canonical_sources_roundtrip(self, source: str) -> None:
        assert serialize(parse(source)) == source


class TestSerializeValidation:
    @pytest.mark.parametrize(
        "message",
        [
            (TextPart("a {b}"),),
            (ParameterPart(key="a:b"),),
            (ParameterPart(key="a?"),),
            (ParameterPart(key="a", type="x|y"),),
            (ParameterPart(key="a", transforms=(FormatterPart("f}"),)),),
            (
                ParameterPart(
                    key="a",
                    transforms=(
                        SwitchCasePart(cases=(SwitchCaseBranch("k,", "v"),), raw=""),
                    ),
                ),
            ),
            (PluralPart(key="n", one="a|b", other="c"),),
            (PluralPart(key="n:m", other="c"),),
        ],
    )
    def test_invalid_ast_rejected(self, message: tuple[object, ...]) -> None:
        with pytest.raises(SerializationValidationError, match="reserved character"):
            serialize(message, validate=True)  # type: ignore[arg-type]

    def test_invalid_ast_serialized_without_validation(self) -> None:
        assert serialize((TextPart("a {b}"),)) == "a {b}"

    def test_valid_message_passes(self) -> None:
        message = parse("{n:number} item{{s}} {g|{ a: x\\, y }}")
        assert serialize(message, validate=True) == "{n:number} item{{n:s}} {g|{ a: x\\, y }}"

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(SerializationValidationError, ValueError)
