"""Hypothesis strategies for Interpolex property-based testing.

Usage:
    from tests.strategies import parsed_messages, chaos_templates

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - chaos_templates, switch_case_parts, plural_parts, parsed_messages
"""

from .template import (
    chaos_templates,
    formatter_parts,
    literal_texts,
    parameter_parts,
    parsed_messages,
    placeholder_parts,
    plain_tokens,
    plural_parts,
    switch_case_parts,
    template_keys,
    transform_parts,
)

__all__ = [
    "chaos_templates",
    "formatter_parts",
    "literal_texts",
    "parameter_parts",
    "parsed_messages",
    "placeholder_parts",
    "plain_tokens",
    "plural_parts",
    "switch_case_parts",
    "template_keys",
    "transform_parts",
]
