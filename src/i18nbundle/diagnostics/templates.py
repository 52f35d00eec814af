"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

_CATEGORY_KEYS = "description, zero, one, two, few, many, other"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_quantity(quantity: object) -> Diagnostic:
        """Quantity could not be converted to plural operands.

        Args:
            quantity: The rejected quantity value

        Returns:
            Diagnostic for INVALID_QUANTITY
        """
        msg = f"Invalid quantity {quantity!r}: expected an integer or a decimal number string"
        return Diagnostic(
            code=DiagnosticCode.INVALID_QUANTITY,
            message=msg,
            hint="Pass an int, a Decimal, or a string such as '1.70'",
        )

    @staticmethod
    def unknown_plural_category(key: str, message_id: str) -> Diagnostic:
        """Raw message data contained a key that is not a category.

        Args:
            key: The unrecognized key
            message_id: The message being constructed

        Returns:
            Diagnostic for UNKNOWN_PLURAL_CATEGORY
        """
        msg = f"Unknown plural category '{key}' in message '{message_id}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_CATEGORY,
            message=msg,
            hint=f"Use one of: {_CATEGORY_KEYS}",
            message_id=message_id,
        )

    @staticmethod
    def template_syntax(source: str, position: int, reason: str) -> Diagnostic:
        """Template text failed to compile.

        Args:
            source: Template source text
            position: Offset of the offending placeholder
            reason: What was wrong with it

        Returns:
            Diagnostic for TEMPLATE_SYNTAX
        """
        msg = f"Invalid template at offset {position}: {reason} in {source!r}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_SYNTAX,
            message=msg,
            hint="Placeholders look like {{Name}} or {{Person.Name}}",
        )

    @staticmethod
    def plural_rule_syntax(rule: str, reason: str) -> Diagnostic:
        """CLDR rule text failed to compile.

        Args:
            rule: The rule source text
            reason: What was wrong with it

        Returns:
            Diagnostic for PLURAL_RULE_SYNTAX
        """
        msg = f"Invalid plural rule {rule!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_RULE_SYNTAX,
            message=msg,
            hint="Rules use CLDR syntax, e.g. 'i = 1 and v = 0' or 'n % 10 = 2..4'",
        )

    @staticmethod
    def message_file_invalid(path: str, reason: str, message_id: str | None = None) -> Diagnostic:
        """Unmarshaled message file has the wrong shape.

        Args:
            path: Message file path
            reason: Description of the offending value
            message_id: Message whose value was rejected (if known)

        Returns:
            Diagnostic for MESSAGE_FILE_INVALID
        """
        msg = f"Invalid message file {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_FILE_INVALID,
            message=msg,
            hint="Each message must be a string or a mapping of category names to strings",
            message_id=message_id,
            source_path=path,
        )

    @staticmethod
    def unsupported_format(file_format: str, path: str) -> Diagnostic:
        """No unmarshaler is registered for a file format.

        Args:
            file_format: Format suffix taken from the path
            path: Message file path

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        msg = f"No unmarshaler registered for format '{file_format}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message=msg,
            hint="Call Bundle.register_unmarshal_func() for this format",
            source_path=path,
        )

    @staticmethod
    def no_language_tag(path: str) -> Diagnostic:
        """A path contains nothing shaped like a language tag.

        Args:
            path: The path that was searched

        Returns:
            Diagnostic for NO_LANGUAGE_TAG
        """
        msg = f"No language tag found in path: {path}"
        return Diagnostic(
            code=DiagnosticCode.NO_LANGUAGE_TAG,
            message=msg,
            hint="Name message files after their language, e.g. 'en-US.json'",
            source_path=path,
        )

    @staticmethod
    def no_plural_rule(family: str, language_tag: str) -> Diagnostic:
        """Templates were registered for a family without a plural rule.

        Args:
            family: Primary subtag that was looked up
            language_tag: Full tag being registered

        Returns:
            Diagnostic for NO_PLURAL_RULE
        """
        msg = f"No plural rule registered for '{family}'"
        return Diagnostic(
            code=DiagnosticCode.NO_PLURAL_RULE,
            message=msg,
            hint=f"Register a PluralRule for '{family}' before adding templates",
            language_tag=language_tag,
        )

    @staticmethod
    def pluralization_unavailable(message_id: str, language_tag: str) -> Diagnostic:
        """A plural category was required for a language with no rule.

        Args:
            message_id: Message being resolved
            language_tag: Language without a rule

        Returns:
            Diagnostic for PLURALIZATION_UNAVAILABLE
        """
        msg = (
            f"Unable to pluralize '{message_id}' because there is no plural rule "
            f"for '{language_tag}'"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURALIZATION_UNAVAILABLE,
            message=msg,
            hint="Plural rules must not be removed after templates are registered",
            message_id=message_id,
            language_tag=language_tag,
        )

    @staticmethod
    def invalid_invocation(name: str, args: tuple[object, ...], reason: str) -> Diagnostic:
        """A localize call received arguments it cannot interpret.

        Args:
            name: Name of the invoked operation
            args: The arguments as received
            reason: Why they were rejected

        Returns:
            Diagnostic for INVALID_INVOCATION
        """
        rendered = ", ".join(repr(arg) for arg in args)
        msg = f"invalid invocation {name}({rendered}); {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INVOCATION,
            message=msg,
            hint="Build requests with by_id() or by_message()",
        )

    @staticmethod
    def default_message_unavailable(message_id: str, category: str) -> Diagnostic:
        """Nothing was translated and the default has no usable content.

        Args:
            message_id: Message being resolved
            category: Plural category that was required

        Returns:
            Diagnostic for DEFAULT_MESSAGE_UNAVAILABLE
        """
        msg = f"No translation and no default content for '{message_id}' ({category})"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_MESSAGE_UNAVAILABLE,
            message=msg,
            hint="Give the default Message content for the category the default language selects",
            message_id=message_id,
        )
