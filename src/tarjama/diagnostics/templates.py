"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every message echoes the offending input verbatim so that a failure can
    be traced back to the catalogue entry that caused it.
    """

    # ------------------------------------------------------------------
    # Locale and reference errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_locale(locale: str) -> Diagnostic:
        """Locale code not recognized.

        Args:
            locale: The input text that failed to convert

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"locale: invalid locale, expected a valid locale code but found `'{locale}'`."
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a CLDR locale code such as 'en', 'fr_CA' or 'sv-FI'",
        )

    @staticmethod
    def message_not_found(locale: str, domain: str, message_id: str) -> Diagnostic:
        """Message missing from every consulted catalogue.

        Args:
            locale: The requested locale
            domain: The catalogue domain
            message_id: The message key

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = (
            f"message not found: message `'{message_id}'` could not be found "
            f"in `'{domain}'` domain for `'{locale}'` locale."
        )
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check the catalogue files or configure a fallback locale",
        )

    # ------------------------------------------------------------------
    # Plural-rule parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def plural_no_default() -> Diagnostic:
        """Template is empty once trimmed."""
        msg = (
            "formatting: failed to parse plural messages, expected at least "
            "a default message but string was terminated."
        )
        return Diagnostic(code=DiagnosticCode.PLURAL_NO_DEFAULT, message=msg)

    @staticmethod
    def rule_unterminated(segment: str) -> Diagnostic:
        """Rule clause opened with '{' but never closed.

        Args:
            segment: The plural segment being parsed
        """
        msg = (
            f"formatting: failed to parse rule for `'{segment}'`, "
            "expected `'}'` but string was terminated."
        )
        return Diagnostic(code=DiagnosticCode.RULE_UNTERMINATED, message=msg)

    @staticmethod
    def rule_unopened(segment: str) -> Diagnostic:
        """Non-default segment does not start with a rule clause.

        Args:
            segment: The plural segment being parsed
        """
        msg = (
            f"formatting: failed to parse rule for `'{segment}'`, "
            "expected `'{'` but string was terminated."
        )
        return Diagnostic(
            code=DiagnosticCode.RULE_UNOPENED,
            message=msg,
            hint="Only the last segment may omit its {rule} clause",
        )

    @staticmethod
    def rule_invalid_bound(bound: str, rule_kind: str, segment: str, reason: str) -> Diagnostic:
        """Range bound is not a signed 64-bit integer.

        Args:
            bound: Which bound failed ("from" or "to")
            rule_kind: "range-to", "range-from" or "range"
            segment: The plural segment being parsed
            reason: Underlying integer parse diagnostic
        """
        msg = (
            f"formatting: failed to parse `'{bound}'` value in {rule_kind} rule "
            f"for `'{segment}'`, {reason}."
        )
        return Diagnostic(code=DiagnosticCode.RULE_INVALID_BOUND, message=msg)

    @staticmethod
    def rule_invalid_value(value: str, segment: str, reason: str) -> Diagnostic:
        """Match rule entry is not a signed 64-bit integer.

        Args:
            value: The offending token
            segment: The plural segment being parsed
            reason: Underlying integer parse diagnostic
        """
        msg = (
            f"formatting: failed to parse value `'{value}'` in match rule "
            f"for `'{segment}'`, {reason}."
        )
        return Diagnostic(code=DiagnosticCode.RULE_INVALID_VALUE, message=msg)

    # ------------------------------------------------------------------
    # Placeholder substitution errors
    # ------------------------------------------------------------------

    @staticmethod
    def placeholder_unterminated() -> Diagnostic:
        """A '{' or '}' reached the end of the template."""
        msg = "invalid format string: expected `'}'` but string was terminated."
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNTERMINATED,
            message=msg,
            hint="Escape literal braces as '{{' and '}}'",
        )

    @staticmethod
    def placeholder_unexpected_close(found: str) -> Diagnostic:
        """A lone '}' followed by another character.

        Args:
            found: The character following the '}'
        """
        msg = f"invalid format string: expected `'}}'`, found `'{found}'`."
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNEXPECTED_CLOSE,
            message=msg,
            hint="Escape literal braces as '{{' and '}}'",
        )

    @staticmethod
    def indexed_value_out_of_range(index: int, available: int) -> Diagnostic:
        """An '{}' placeholder consumed more values than the context holds."""
        msg = (
            f"invalid reference to indexed value `'{index}'` "
            f"(there is {available} value)."
        )
        return Diagnostic(code=DiagnosticCode.INDEXED_VALUE_OUT_OF_RANGE, message=msg)

    @staticmethod
    def positional_value_out_of_range(index: int, available: int) -> Diagnostic:
        """A positional or named reference points past the context values."""
        msg = (
            f"invalid reference to positional value `'{index}'` "
            f"(there is {available} value)."
        )
        return Diagnostic(code=DiagnosticCode.POSITIONAL_VALUE_OUT_OF_RANGE, message=msg)

    @staticmethod
    def value_not_found(name: str) -> Diagnostic:
        """Named placeholder absent from the context.

        Args:
            name: The trimmed placeholder content
        """
        msg = f"cannot find value `'{name}'` in this context."
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_FOUND,
            message=msg,
            hint=f"Add a value named '{name}' to the context",
        )

    @staticmethod
    def count_not_provided() -> Diagnostic:
        """'{?}' used without a count in the context."""
        msg = "invalid reference to count ( {?} ) value."
        return Diagnostic(
            code=DiagnosticCode.COUNT_NOT_PROVIDED,
            message=msg,
            hint="Pass a count to the context",
        )

    # ------------------------------------------------------------------
    # Loading errors
    # ------------------------------------------------------------------

    @staticmethod
    def directory_unreadable(reason: str) -> Diagnostic:
        """Catalogue directory could not be listed."""
        msg = f"unreadable node: directory, {reason}."
        return Diagnostic(code=DiagnosticCode.DIRECTORY_UNREADABLE, message=msg)

    @staticmethod
    def file_unreadable(path: str, reason: str) -> Diagnostic:
        """Catalogue file could not be read."""
        msg = f"unreadable node: file `{path}`, {reason}."
        return Diagnostic(code=DiagnosticCode.FILE_UNREADABLE, message=msg)

    @staticmethod
    def filename_invalid_format(filename: str) -> Diagnostic:
        """Catalogue filename lacks the domain/locale separator."""
        msg = (
            "invalid filename: format, expected `{domain}.{locale}.{ext}` "
            f"for `{filename}`."
        )
        return Diagnostic(code=DiagnosticCode.FILENAME_INVALID_FORMAT, message=msg)

    @staticmethod
    def filename_invalid_locale(locale: str, filename: str) -> Diagnostic:
        """Catalogue filename carries an unknown locale code."""
        msg = (
            "invalid filename: locale, expected valid locale code, "
            f"found `{locale}` in `{filename}`."
        )
        return Diagnostic(code=DiagnosticCode.FILENAME_INVALID_LOCALE, message=msg)

    @staticmethod
    def file_unparsable(path: str, reason: str) -> Diagnostic:
        """Catalogue file is not valid TOML."""
        msg = f"unparsable node: file `{path}`, {reason}."
        return Diagnostic(code=DiagnosticCode.FILE_UNPARSABLE, message=msg)

    @staticmethod
    def file_invalid_value(type_name: str, key: str, path: str) -> Diagnostic:
        """Catalogue file maps a key to something other than a string."""
        msg = f"invalid type: {type_name}, expected a string for key `{key}` in `{path}`."
        return Diagnostic(
            code=DiagnosticCode.FILE_INVALID_VALUE,
            message=msg,
            hint="Catalogue files are flat tables of key = \"template\" pairs",
        )
