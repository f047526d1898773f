"""Quickstart - Parsing Interpolation Templates.

Demonstrates the Interpolex API end to end:

1. Parse template text to AST
2. Plural groups and count key inheritance
3. Inline switch-cases
4. Introspection (required keys, formatters)
5. Serialization and plain-data export
6. Diagnostics for unresolvable plural groups

Python 3.13+.
"""

from __future__ import annotations


def example_1_basic_parsing() -> None:
    """Parse text and parameters."""
    from interpolex import parse_template
    from interpolex.syntax.ast import ParameterPart, TextPart

    print("=" * 60)
    print("Example 1: Basic Parsing")
    print("=" * 60)

    message = parse_template("Hello {name?:string|upper}, welcome back!")

    for part in message:
        if TextPart.guard(part):
            print(f"Text:      {part.content!r}")
        elif ParameterPart.guard(part):
            formatters = [t.name for t in part.transforms if t.kind == "formatter"]
            print(
                f"Parameter: key={part.key!r} type={part.type!r} "
                f"optional={part.optional} formatters={formatters}"
            )
    print()


def example_2_plurals() -> None:
    """Plural groups map positional values to count forms."""
    from interpolex import parse_template
    from interpolex.syntax.ast import PluralPart

    print("=" * 60)
    print("Example 2: Plural Groups")
    print("=" * 60)

    # The second and third groups inherit 'count' from the numeric parameter.
    message = parse_template(
        "{count:number} item{{s}} in {{no boxes|a box|many boxes}} "
        "and {{files:a file|files}}"
    )

    for part in message:
        if PluralPart.guard(part):
            print(f"Plural on {part.key!r}: {part.forms}")
    print()


def example_3_switch_cases() -> None:
    """Switch-cases map discrete values to replacement text."""
    from interpolex import parse_template
    from interpolex.syntax.ast import ParameterPart, SwitchCasePart

    print("=" * 60)
    print("Example 3: Switch-Cases")
    print("=" * 60)

    message = parse_template(r"{gender|{ male: his, female: her, *: their\, or its }} profile")

    for part in message:
        if ParameterPart.guard(part):
            for transform in part.transforms:
                if SwitchCasePart.guard(transform):
                    for branch in transform.cases:
                        print(f"  {branch.key!r:>10} -> {branch.value!r}")
    print()


def example_4_introspection() -> None:
    """List the bindings a template needs."""
    from interpolex import introspect_template

    print("=" * 60)
    print("Example 4: Introspection")
    print("=" * 60)

    info = introspect_template("{user?} sent {count:number|compact} message{{s}} {when|relative}")

    print(f"Parameter keys: {sorted(info.get_parameter_keys())}")
    print(f"Required keys:  {sorted(info.get_required_keys())}")
    print(f"Formatters:     {sorted(info.get_formatter_names())}")
    print(f"Plural keys:    {sorted(info.plural_keys)}")
    print()


def example_5_serialization() -> None:
    """Write a parsed template back as canonical template text."""
    import json

    from interpolex import parse_template, serialize_template
    from interpolex.syntax import to_plain

    print("=" * 60)
    print("Example 5: Serialization and Export")
    print("=" * 60)

    source = "{ count : number } item{{s}}"
    message = parse_template(source)

    print(f"Source:    {source}")
    print(f"Canonical: {serialize_template(message, validate=True)}")
    print(json.dumps(to_plain(message), indent=2))
    print()


def example_6_diagnostics() -> None:
    """A plural group without any count key aborts the parse."""
    from interpolex import PluralKeyMissingError, parse_template
    from interpolex.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 6: Diagnostics")
    print("=" * 60)

    try:
        parse_template("You have\nnew message{{s}}")
    except PluralKeyMissingError as error:
        print(error)
        if error.diagnostic is not None:
            formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
            print(formatter.format(error.diagnostic))
    print()


def main() -> None:
    """Run all examples."""
    print()
    print("Interpolex Quickstart")
    print()

    example_1_basic_parsing()
    example_2_plurals()
    example_3_switch_cases()
    example_4_introspection()
    example_5_serialization()
    example_6_diagnostics()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
