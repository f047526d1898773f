"""Interpolex exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TemplateError(Exception):
    """Base exception for all Interpolex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TemplateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TemplateSyntaxError(TemplateError):
    """Template could not be parsed into a message AST.

    The grammar is permissive: malformed types, formatters and switch-cases
    degrade to defaults. Only unresolvable references abort the parse.
    """


class PluralKeyMissingError(TemplateSyntaxError):
    """Plural group has no count key.

    Raised when a plural group omits its key and no earlier numeric
    parameter or plural group in the same template established one.

    Example:
        Test{{s}}  ← which count selects 's'?

    No partial result is returned.
    """
