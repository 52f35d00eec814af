"""Integrity exceptions for the strict call convention.

These exceptions indicate failures the caller declared impossible, not
recoverable localization errors. The ``must_*`` operations raise them so
they propagate to the top level instead of being collected.

Design:
    - NOT subclasses of I18nError (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - system failures)
    ├─ ImmutabilityViolationError (mutation attempt on frozen object)
    └─ LocalizationIntegrityError (strict mode operation failure)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from i18nbundle.diagnostics import I18nError

__all__ = [
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "LocalizationIntegrityError",
    "raise_integrity_error",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (bundle, localizer, message)
        operation: Operation being performed (localize, add_message_templates, ...)
        key: Message id, language tag or path involved (optional)
        expected: Expected outcome (optional)
        actual: Actual outcome found (optional)
        timestamp: Time of error detection (time.monotonic())
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None
    timestamp: float | None = None


class DataIntegrityError(Exception):
    """Base exception for all integrity failures.

    NOT an I18nError subclass, so handlers written for recoverable
    localization errors do not swallow it.

    This exception is immutable after construction.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes during propagation.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable integrity error."""


@final
class LocalizationIntegrityError(DataIntegrityError):
    """A strict (``must_*``) operation failed.

    Carries the localization errors that triggered it and, for resolution
    failures, the message id that could not be resolved.

    Attributes:
        errors: Tuple of I18nError instances that triggered this exception
        message_id: The message id involved ("" when not applicable)
    """

    __slots__ = ("_errors", "_message_id")

    _errors: tuple[I18nError, ...]
    _message_id: str

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        errors: Iterable[I18nError] = (),
        message_id: str = "",
    ) -> None:
        """Initialize LocalizationIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            errors: Errors that caused the failure
            message_id: Message id involved
        """
        # Must set these before calling super().__init__ which freezes
        object.__setattr__(self, "_errors", tuple(errors))
        object.__setattr__(self, "_message_id", message_id)
        super().__init__(message, context)

    @property
    def errors(self) -> tuple[I18nError, ...]:
        """Localization errors that triggered this exception."""
        return self._errors

    @property
    def message_id(self) -> str:
        """Message id involved in the failure."""
        return self._message_id

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"LocalizationIntegrityError({self.args[0]!r}, "
            f"message_id={self._message_id!r}, "
            f"error_count={len(self._errors)})"
        )


def raise_integrity_error(
    component: str,
    operation: str,
    errors: Iterable[I18nError],
    *,
    key: str | None = None,
    message_id: str = "",
) -> NoReturn:
    """Raise LocalizationIntegrityError for a failed strict operation.

    Args:
        component: Component whose strict operation failed
        operation: Name of the fallible operation
        errors: Errors it produced (at least one)
        key: Identifier recorded in the context
        message_id: Message id recorded on the exception

    Raises:
        LocalizationIntegrityError: Always
    """
    errors = tuple(errors)
    summary = "; ".join(str(error) for error in errors) or "no result"
    msg = f"Strict {operation} failed: {summary}"
    context = IntegrityContext(
        component=component,
        operation=operation,
        key=key,
        expected="<no errors>",
        actual=f"<{len(errors)} error(s)>",
        timestamp=time.monotonic(),
    )
    raise LocalizationIntegrityError(msg, context, errors=errors, message_id=message_id)
