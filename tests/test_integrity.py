"""Tests for integrity exceptions raised by the strict call convention.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from i18nbundle.diagnostics import I18nError, InvalidQuantityError
from i18nbundle.integrity import (
    DataIntegrityError,
    ImmutabilityViolationError,
    IntegrityContext,
    LocalizationIntegrityError,
    raise_integrity_error,
)


def _integrity_error() -> LocalizationIntegrityError:
    with pytest.raises(LocalizationIntegrityError) as exc_info:
        raise_integrity_error(
            "localizer",
            "localize",
            [InvalidQuantityError("bad quantity")],
            key="Cats",
            message_id="Cats",
        )
    return exc_info.value


class TestLocalizationIntegrityError:
    """Construction through raise_integrity_error."""

    def test_message_summarizes_errors(self) -> None:
        assert str(_integrity_error()) == "Strict localize failed: bad quantity"

    def test_context(self) -> None:
        context = _integrity_error().context
        assert context is not None
        assert context.component == "localizer"
        assert context.operation == "localize"
        assert context.key == "Cats"
        assert context.actual == "<1 error(s)>"
        assert context.timestamp is not None

    def test_errors_and_message_id(self) -> None:
        error = _integrity_error()
        assert error.message_id == "Cats"
        assert len(error.errors) == 1
        assert isinstance(error.errors[0], InvalidQuantityError)

    def test_not_an_i18n_error(self) -> None:
        error = _integrity_error()
        assert isinstance(error, DataIntegrityError)
        assert not isinstance(error, I18nError)

    def test_no_errors(self) -> None:
        with pytest.raises(LocalizationIntegrityError, match="no result"):
            raise_integrity_error("bundle", "add_message_templates", ())

    def test_repr(self) -> None:
        assert repr(_integrity_error()) == (
            "LocalizationIntegrityError('Strict localize failed: bad quantity', "
            "message_id='Cats', error_count=1)"
        )


class TestImmutability:
    """Integrity errors cannot be modified after construction."""

    def test_setattr_rejected(self) -> None:
        error = _integrity_error()
        with pytest.raises(ImmutabilityViolationError):
            error._message_id = "Other"  # type: ignore[misc]

    def test_delattr_rejected(self) -> None:
        error = DataIntegrityError("failure")
        with pytest.raises(ImmutabilityViolationError):
            del error._context

    def test_exception_machinery_still_works(self) -> None:
        def chained() -> None:
            try:
                msg = "inner"
                raise ValueError(msg)
            except ValueError as e:
                raise DataIntegrityError("outer") from e

        with pytest.raises(DataIntegrityError) as exc_info:
            chained()
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_context_is_frozen(self) -> None:
        context = IntegrityContext(component="bundle", operation="load_message_file")
        with pytest.raises(AttributeError):
            context.key = "x"  # type: ignore[misc]

    def test_data_integrity_repr(self) -> None:
        error = DataIntegrityError("failure")
        assert repr(error) == "DataIntegrityError('failure', context=None)"
