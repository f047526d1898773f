"""Fuzz testing infrastructure for Interpolex.

This package contains:
- test_template_parser_property: Segmenter and parser invariants over arbitrary text

Run with ``pytest -m fuzz``.

Python 3.13+.
"""
