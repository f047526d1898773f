"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def plural_key_missing(
        content: str,
        span: SourceSpan | None = None,
        source_line: str | None = None,
    ) -> Diagnostic:
        """Plural group without explicit or inherited count key.

        Args:
            content: Plural group content without its double braces
            span: Location of the plural group in the template
            source_line: Template line containing the plural group

        Returns:
            Diagnostic for PLURAL_KEY_MISSING
        """
        group = "{{" + content + "}}"
        msg = f"Plural group '{group}' has no count key"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_KEY_MISSING,
            message=msg,
            span=span,
            hint=(
                "Write the key explicitly, e.g. {{count:" + content.strip() + "}}, "
                "or place a {count:number} parameter before the plural group"
            ),
            source_line=source_line,
        )

    @staticmethod
    def plural_form_count_unsupported(
        key: str,
        count: int,
        span: SourceSpan | None = None,
        source_line: str | None = None,
    ) -> Diagnostic:
        """Plural group with a value count that has no positional layout.

        Args:
            key: Resolved count key of the plural group
            count: Number of '|'-separated values
            span: Location of the plural group in the template
            source_line: Template line containing the plural group

        Returns:
            Diagnostic for PLURAL_FORM_COUNT_UNSUPPORTED (warning)
        """
        msg = f"Plural group for '{key}' has {count} forms; expected 1, 2, 3 or 6"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_COUNT_UNSUPPORTED,
            message=msg,
            span=span,
            hint="Values map to zero|one|two|few|many|other; list all six forms",
            source_line=source_line,
            severity="warning",
        )
