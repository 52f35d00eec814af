"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (quantities, categories, templates, rules)
        2000-2999: Ingestion errors (message files, formats, language tags)
        3000-3999: Configuration errors (missing plural rules)
        4000-4999: Invocation errors (malformed localize calls, default messages)
    """

    # Construction errors (1000-1999)
    INVALID_QUANTITY = 1001
    UNKNOWN_PLURAL_CATEGORY = 1002
    TEMPLATE_SYNTAX = 1003
    PLURAL_RULE_SYNTAX = 1004

    # Ingestion errors (2000-2999)
    MESSAGE_FILE_INVALID = 2001
    UNSUPPORTED_FORMAT = 2002
    NO_LANGUAGE_TAG = 2003

    # Configuration errors (3000-3999)
    NO_PLURAL_RULE = 3001
    PLURALIZATION_UNAVAILABLE = 3002

    # Invocation errors (4000-4999)
    INVALID_INVOCATION = 4001
    DEFAULT_MESSAGE_UNAVAILABLE = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_id: Message identifier involved (if any)
        language_tag: Language tag involved (if any)
        source_path: Message file path involved (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_id: str | None = None
    language_tag: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[NO_PLURAL_RULE]: No plural rule registered for 'xx'
              --> language: xx-yy
              = help: Register a PluralRule for 'xx' before adding templates

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
