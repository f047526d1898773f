"""Template parser module.

Module Organization:
- core.py: TemplateParser class, span classification and the segment fold
- rules.py: Placeholder grammar rules (parameters, transforms, switch-cases, plurals)

Public API:
    TemplateParser: Main parser class
    classify_span: Bracketed segment classification (advanced usage)
"""

from interpolex.syntax.parser.core import TemplateParser, classify_span

__all__ = ["TemplateParser", "classify_span"]
