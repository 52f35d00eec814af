"""Tests for diagnostics: codes, error templates, exceptions and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from i18nbundle.diagnostics import (
    ConfigurationError,
    ConstructionError,
    DefaultMessageUnavailableError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    I18nError,
    InvalidInvocationError,
    InvalidQuantityError,
    MessageFileError,
    NoLanguageTagError,
    NoPluralRuleError,
    OutputFormat,
    PluralizationUnavailableError,
    PluralRuleSyntaxError,
    TemplateSyntaxError,
    UnknownPluralCategoryError,
    UnsupportedFormatError,
)


class TestDiagnosticCode:
    """Code numbering by category."""

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.INVALID_QUANTITY, 1000, 1999),
            (DiagnosticCode.MESSAGE_FILE_INVALID, 2000, 2999),
            (DiagnosticCode.NO_PLURAL_RULE, 3000, 3999),
            (DiagnosticCode.INVALID_INVOCATION, 4000, 4999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorHierarchy:
    """Exception classes group by failure kind."""

    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidQuantityError,
            UnknownPluralCategoryError,
            TemplateSyntaxError,
            PluralRuleSyntaxError,
            MessageFileError,
            UnsupportedFormatError,
            NoLanguageTagError,
        ],
    )
    def test_construction_errors(self, error_type: type[I18nError]) -> None:
        assert issubclass(error_type, ConstructionError)

    @pytest.mark.parametrize("error_type", [NoPluralRuleError, PluralizationUnavailableError])
    def test_configuration_errors(self, error_type: type[I18nError]) -> None:
        assert issubclass(error_type, ConfigurationError)

    @pytest.mark.parametrize(
        "error_type", [InvalidInvocationError, DefaultMessageUnavailableError]
    )
    def test_direct_subclasses(self, error_type: type[I18nError]) -> None:
        assert issubclass(error_type, I18nError)
        assert not issubclass(error_type, (ConstructionError, ConfigurationError))

    def test_plain_message(self) -> None:
        error = I18nError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.no_plural_rule("xx", "xx-yy")
        error = NoPluralRuleError(diagnostic)
        assert str(error) == "No plural rule registered for 'xx'"
        assert error.diagnostic is diagnostic

    def test_error_attributes(self) -> None:
        assert InvalidQuantityError("bad", quantity="x").quantity == "x"
        assert TemplateSyntaxError("bad", position=4).position == 4


class TestErrorTemplate:
    """Messages and metadata of each template."""

    def test_invalid_quantity(self) -> None:
        diagnostic = ErrorTemplate.invalid_quantity("abc")
        assert diagnostic.code == DiagnosticCode.INVALID_QUANTITY
        assert "'abc'" in diagnostic.message

    def test_unknown_plural_category(self) -> None:
        diagnostic = ErrorTemplate.unknown_plural_category("plenty", "Apples")
        assert diagnostic.message == "Unknown plural category 'plenty' in message 'Apples'"
        assert diagnostic.message_id == "Apples"

    def test_template_syntax(self) -> None:
        diagnostic = ErrorTemplate.template_syntax("Hi {{", 3, "unterminated placeholder")
        assert diagnostic.message == (
            "Invalid template at offset 3: unterminated placeholder in 'Hi {{'"
        )

    def test_message_file_invalid(self) -> None:
        diagnostic = ErrorTemplate.message_file_invalid("en.json", "bad shape", message_id="X")
        assert diagnostic.source_path == "en.json"
        assert diagnostic.message_id == "X"

    def test_unsupported_format(self) -> None:
        diagnostic = ErrorTemplate.unsupported_format("ini", "en.ini")
        assert diagnostic.message == "No unmarshaler registered for format 'ini'"

    def test_pluralization_unavailable(self) -> None:
        diagnostic = ErrorTemplate.pluralization_unavailable("Cats", "fr-fr")
        assert diagnostic.message == (
            "Unable to pluralize 'Cats' because there is no plural rule for 'fr-fr'"
        )
        assert diagnostic.language_tag == "fr-fr"

    def test_invalid_invocation(self) -> None:
        diagnostic = ErrorTemplate.invalid_invocation("localize", ("Cats", 1), "too many")
        assert diagnostic.message == "invalid invocation localize('Cats', 1); too many"

    def test_default_message_unavailable(self) -> None:
        diagnostic = ErrorTemplate.default_message_unavailable("Cats", "one")
        assert diagnostic.message == "No translation and no default content for 'Cats' (one)"

    def test_every_template_has_a_hint(self) -> None:
        diagnostics = [
            ErrorTemplate.invalid_quantity(1.5),
            ErrorTemplate.unknown_plural_category("x", "y"),
            ErrorTemplate.template_syntax("{{", 0, "r"),
            ErrorTemplate.plural_rule_syntax("n", "r"),
            ErrorTemplate.message_file_invalid("p", "r"),
            ErrorTemplate.unsupported_format("f", "p"),
            ErrorTemplate.no_language_tag("p"),
            ErrorTemplate.no_plural_rule("f", "t"),
            ErrorTemplate.pluralization_unavailable("m", "t"),
            ErrorTemplate.invalid_invocation("n", (), "r"),
            ErrorTemplate.default_message_unavailable("m", "other"),
        ]
        assert all(diagnostic.hint for diagnostic in diagnostics)
        assert len({diagnostic.code for diagnostic in diagnostics}) == len(DiagnosticCode)


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        diagnostic = ErrorTemplate.no_plural_rule("xx", "xx-yy")
        assert diagnostic.format_error() == (
            "error[NO_PLURAL_RULE]: No plural rule registered for 'xx'\n"
            "  --> language: xx-yy\n"
            "  = help: Register a PluralRule for 'xx' before adding templates"
        )

    def test_rust_format_with_path_and_message(self) -> None:
        diagnostic = ErrorTemplate.message_file_invalid("en.json", "bad", message_id="Cats")
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[1] == "  --> en.json"
        assert lines[2] == "  --> message: Cats"

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.unsupported_format("ini", "en.ini")
        assert formatter.format(diagnostic) == (
            "UNSUPPORTED_FORMAT: No unmarshaler registered for format 'ini'"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.pluralization_unavailable("Cats", "lv")))
        assert data["code"] == "PLURALIZATION_UNAVAILABLE"
        assert data["code_value"] == 3002
        assert data["message_id"] == "Cats"
        assert data["language_tag"] == "lv"
        assert data["severity"] == "error"
        assert "source_path" not in data

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.TEMPLATE_SYNTAX, message="x" * 50)
        assert formatter.format(diagnostic) == "TEMPLATE_SYNTAX: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.no_language_tag("a"), ErrorTemplate.no_language_tag("b")]
        )
        assert output.count("\n\n") == 1

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.NO_PLURAL_RULE, message="m", severity="warning")
        assert DiagnosticFormatter().format(diagnostic) == "warning[NO_PLURAL_RULE]: m"
