"""i18nbundle exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Hierarchy:
    I18nError
    ├─ ConstructionError (bad input to a constructing operation)
    │  ├─ InvalidQuantityError
    │  ├─ UnknownPluralCategoryError
    │  ├─ TemplateSyntaxError
    │  ├─ PluralRuleSyntaxError
    │  ├─ MessageFileError
    │  ├─ UnsupportedFormatError
    │  └─ NoLanguageTagError
    ├─ ConfigurationError (bundle state cannot serve the request)
    │  ├─ NoPluralRuleError
    │  └─ PluralizationUnavailableError
    ├─ InvalidInvocationError
    └─ DefaultMessageUnavailableError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "DefaultMessageUnavailableError",
    "I18nError",
    "InvalidInvocationError",
    "InvalidQuantityError",
    "MessageFileError",
    "NoLanguageTagError",
    "NoPluralRuleError",
    "PluralRuleSyntaxError",
    "PluralizationUnavailableError",
    "TemplateSyntaxError",
    "UnknownPluralCategoryError",
    "UnsupportedFormatError",
]


class I18nError(Exception):
    """Base exception for all i18nbundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConstructionError(I18nError):
    """Input to a constructing operation was rejected.

    Raised synchronously by the operation that received the bad input;
    never silently dropped.
    """


class InvalidQuantityError(ConstructionError):
    """Quantity is neither an integer nor a decimal number string.

    Attributes:
        quantity: The rejected value
    """

    def __init__(self, message: str | Diagnostic, *, quantity: object = None) -> None:
        super().__init__(message)
        self.quantity = quantity


class UnknownPluralCategoryError(ConstructionError):
    """Raw message data used a key that is not a plural category."""


class TemplateSyntaxError(ConstructionError):
    """Template text has an unterminated or malformed placeholder.

    Attributes:
        position: Character offset of the offending placeholder
    """

    def __init__(self, message: str | Diagnostic, *, position: int = 0) -> None:
        super().__init__(message)
        self.position = position


class PluralRuleSyntaxError(ConstructionError):
    """CLDR plural rule text could not be compiled."""


class MessageFileError(ConstructionError):
    """Unmarshaled message file has an invalid shape."""


class UnsupportedFormatError(ConstructionError):
    """No unmarshal function is registered for a message file format."""


class NoLanguageTagError(ConstructionError):
    """A message file path contains no language tag."""


class ConfigurationError(I18nError):
    """Bundle configuration cannot satisfy the operation."""


class NoPluralRuleError(ConfigurationError):
    """Templates were registered for a language family with no plural rule."""


class PluralizationUnavailableError(ConfigurationError):
    """A plural category was needed for a language that has no plural rule.

    During resolution this aborts the whole fallback chain: the bundle lost
    a rule that registration guaranteed, so later languages are not tried.
    """


class InvalidInvocationError(I18nError):
    """A localize call was made with arguments it cannot interpret."""


class DefaultMessageUnavailableError(I18nError):
    """No translation was found and the default message has no usable content."""
