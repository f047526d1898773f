"""Interpolex - parser for interpolation templates in localized messages.

Parses message templates that mix literal text with parameter placeholders,
plural groups and inline switch-cases into an immutable, ordered AST for a
rendering engine to interpolate:

    Hello {name?:string|upper}, you have {count:number} message{{s}}
    {gender|{ male: his, female: her, *: their }} profile

Public API:
    parse_template - Parse template text to AST
    TemplateParser - Configurable parser (size limit, numeric types)
    serialize_template - Serialize AST back to template text
    introspect_template - Extract parameters, plural keys and formatters

Exceptions:
    TemplateError - Base exception class
    TemplateSyntaxError - Parse errors
    PluralKeyMissingError - Plural group without a resolvable count key

Submodules:
    interpolex.syntax.ast - AST node types (TextPart, ParameterPart, PluralPart, ...)
    interpolex.syntax.export - Plain-data (JSON-ready) export
    interpolex.introspection - Template introspection
    interpolex.diagnostics - Diagnostic codes, templates and formatting
"""

from .diagnostics import PluralKeyMissingError, TemplateError, TemplateSyntaxError
from .introspection import introspect_template
from .syntax import TemplateParser
from .syntax import parse as parse_template
from .syntax import serialize as serialize_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("interpolex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "PluralKeyMissingError",
    "TemplateError",
    "TemplateParser",
    "TemplateSyntaxError",
    "__version__",
    "introspect_template",
    "parse_template",
    "serialize_template",
]
