"""Diagnostic system for i18nbundle errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    ConstructionError,
    DefaultMessageUnavailableError,
    I18nError,
    InvalidInvocationError,
    InvalidQuantityError,
    MessageFileError,
    NoLanguageTagError,
    NoPluralRuleError,
    PluralizationUnavailableError,
    PluralRuleSyntaxError,
    TemplateSyntaxError,
    UnknownPluralCategoryError,
    UnsupportedFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "DefaultMessageUnavailableError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "InvalidInvocationError",
    "InvalidQuantityError",
    "MessageFileError",
    "NoLanguageTagError",
    "NoPluralRuleError",
    "OutputFormat",
    "PluralRuleSyntaxError",
    "PluralizationUnavailableError",
    "TemplateSyntaxError",
    "UnknownPluralCategoryError",
    "UnsupportedFormatError",
]
