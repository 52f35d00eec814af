"""Bundle - store of message templates, plural rules and unmarshalers.

An application usually builds one Bundle at startup, loads its message
files into it, and then shares it read-only between Localizers.

Python 3.13+. External dependencies: Babel (CLDR plural rules), PyYAML.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from i18nbundle.constants import COUNT_FIELD
from i18nbundle.diagnostics import ErrorTemplate, I18nError, NoPluralRuleError
from i18nbundle.enums import PluralCategory
from i18nbundle.integrity import raise_integrity_error
from i18nbundle.locale_utils import language_family, normalize_language_tag
from i18nbundle.localization.loading import decode_message_file, default_unmarshalers
from i18nbundle.localization.types import LanguageTag, MessageId, Quantity, UnmarshalFunc

from .message import MessageTemplate
from .plural_rules import PluralRule, PluralRuleTable
from .template import template_fields

__all__ = ["Bundle"]

logger = logging.getLogger(__name__)


class Bundle:
    """Message templates and plural rules for every supported language.

    Language tags are lowercased at registration; separators are kept as
    written, so ``en-US`` and ``en_US`` are distinct tags of family ``en``.

    Thread Safety:
        Build the bundle sequentially, then share it. Concurrent reads are
        safe; mutation concurrent with any other access is not.

    Example:
        >>> bundle = Bundle()
        >>> bundle.add_message_templates(
        ...     "en", MessageTemplate.from_mapping("HelloWorld", {"other": "Hello World!"})
        ... )
        >>> bundle.render("en", "HelloWorld", PluralCategory.OTHER)
        'Hello World!'
    """

    __slots__ = ("_message_templates", "_plural_rules", "_unmarshalers")

    def __init__(
        self,
        *,
        builtin_plural_rules: bool = True,
        plural_rules: Mapping[str, PluralRule] | None = None,
        unmarshalers: Mapping[str, UnmarshalFunc] | None = None,
    ) -> None:
        """Initialize Bundle.

        Args:
            builtin_plural_rules: Resolve bare family tags (``en``, ``ru``)
                to Babel's CLDR plural rules when no rule was registered
            plural_rules: Rules to register up front, keyed by language tag
            unmarshalers: Format registry to use instead of the default
                json/toml/yaml registry
        """
        self._message_templates: dict[LanguageTag, dict[MessageId, MessageTemplate]] = {}
        self._plural_rules = PluralRuleTable(builtin=builtin_plural_rules)
        self._unmarshalers: dict[str, UnmarshalFunc] = (
            default_unmarshalers() if unmarshalers is None else dict(unmarshalers)
        )
        for language_tag, rule in (plural_rules or {}).items():
            self.register_plural_rule(language_tag, rule)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Bundle(languages={len(self._message_templates)}, "
            f"plural_rules={len(self._plural_rules)}, "
            f"formats={sorted(self._unmarshalers)})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def register_unmarshal_func(self, file_format: str, func: UnmarshalFunc) -> None:
        """Register the unmarshal function for a message file format.

        Args:
            file_format: Path suffix without the dot (e.g., "json", "ini")
            func: Callable decoding file bytes into raw message data
        """
        self._unmarshalers[file_format] = func
        logger.debug("Registered unmarshaler for format %r", file_format)

    @property
    def unmarshal_formats(self) -> frozenset[str]:
        """Formats with a registered unmarshal function."""
        return frozenset(self._unmarshalers)

    def register_plural_rule(self, language_tag: str, rule: PluralRule) -> None:
        """Register the plural rule for a language tag or family."""
        self._plural_rules[normalize_language_tag(language_tag)] = rule

    def remove_plural_rule(self, language_tag: str) -> None:
        """Remove the plural rule for a language tag.

        A removed bare family tag no longer resolves to its built-in rule.
        Removing the rule of a tag that has templates makes every
        resolution that reaches that tag with a quantity fail.
        """
        self._plural_rules.pop(normalize_language_tag(language_tag), None)

    def get_plural_rule(self, language_tag: str) -> PluralRule | None:
        """Return the plural rule for a language tag, if any."""
        return self._plural_rules.get(normalize_language_tag(language_tag))

    @property
    def plural_rules(self) -> Mapping[LanguageTag, PluralRule]:
        """Plural rules keyed by language tag (built-in family rules included)."""
        return self._plural_rules

    # ------------------------------------------------------------------
    # Message templates
    # ------------------------------------------------------------------

    def add_message_templates(self, language_tag: str, *templates: MessageTemplate) -> None:
        """Add message templates for a language.

        The plural rule of the tag's family is copied under the full tag.
        Re-adding a message id replaces the earlier template.

        Args:
            language_tag: Language of the templates (e.g., "en-US")
            *templates: Templates to add

        Raises:
            NoPluralRuleError: If no plural rule exists for the tag's family
        """
        tag = normalize_language_tag(language_tag)
        family = language_family(tag)
        rule = self._plural_rules.get(family)
        if rule is None:
            raise NoPluralRuleError(ErrorTemplate.no_plural_rule(family, tag))
        self._plural_rules[tag] = rule

        store = self._message_templates.setdefault(tag, {})
        for template in templates:
            store[template.id] = template
            logger.debug("Registered message: %s (%s)", template.id, tag)
        logger.info("Added %d message templates for %s", len(templates), tag)

    def must_add_message_templates(self, language_tag: str, *templates: MessageTemplate) -> None:
        """Add message templates, raising LocalizationIntegrityError on failure."""
        try:
            self.add_message_templates(language_tag, *templates)
        except I18nError as error:
            raise_integrity_error("bundle", "add_message_templates", (error,), key=language_tag)

    @property
    def language_tags(self) -> tuple[LanguageTag, ...]:
        """Tags that have templates, in registration order."""
        return tuple(self._message_templates)

    def message_templates(self, language_tag: str) -> Mapping[MessageId, MessageTemplate]:
        """Read-only view of the templates registered for a tag."""
        store = self._message_templates.get(normalize_language_tag(language_tag), {})
        return MappingProxyType(store)

    def get_message_template(
        self, language_tag: str, message_id: MessageId
    ) -> MessageTemplate | None:
        """Return one template, or None if the tag or id is unknown."""
        store = self._message_templates.get(normalize_language_tag(language_tag))
        if store is None:
            return None
        return store.get(message_id)

    def has_message(self, language_tag: str, message_id: MessageId) -> bool:
        """Check if a tag has a template for a message id."""
        return self.get_message_template(language_tag, message_id) is not None

    def render(
        self,
        language_tag: str,
        message_id: MessageId,
        category: PluralCategory,
        data: object = None,
        *,
        count: Quantity | None = None,
    ) -> str | None:
        """Render one message in one language and plural category.

        Args:
            language_tag: Language to render
            message_id: Message identifier
            category: Plural category to render
            data: Substitution data (mapping, dataclass, named tuple or an
                object with template_fields())
            count: Quantity made available to the template as ``Count``

        Returns:
            Rendered text, or None when the tag has no templates, the id is
            unknown for the tag, or the message has no content for category

        Raises:
            InvalidInvocationError: If data cannot be projected into fields
        """
        template = self.get_message_template(language_tag, message_id)
        if template is None:
            return None
        fields = template_fields(data)
        if count is not None:
            fields[COUNT_FIELD] = count
        return template.render(category, fields)

    # ------------------------------------------------------------------
    # Message files
    # ------------------------------------------------------------------

    def parse_message_file_bytes(self, buf: bytes, path: str | os.PathLike[str]) -> None:
        """Parse message file bytes and add their templates to the bundle.

        The format is everything after the last "." of the file name. The
        language tag is the last tag-shaped run in the path with the format
        removed (``locales/active.en-US.json`` is ``en-US``). Empty input
        is ignored.

        Args:
            buf: File contents
            path: File path (only used for the format and language tag)

        Raises:
            UnsupportedFormatError: If no unmarshaler handles the format
            MessageFileError: If the contents cannot be decoded or have the
                wrong shape
            UnknownPluralCategoryError: If a message uses an unknown category
            TemplateSyntaxError: If a template fails to compile
            NoLanguageTagError: If the path contains no language tag
            NoPluralRuleError: If the tag's family has no plural rule
        """
        if not buf:
            return
        path_text = os.fspath(path)
        try:
            language_tag, templates = decode_message_file(buf, path_text, self._unmarshalers)
            self.add_message_templates(language_tag, *templates)
        except I18nError as e:
            logger.error("Failed to parse message file %s: %s", path_text, e)
            raise

    def must_parse_message_file_bytes(self, buf: bytes, path: str | os.PathLike[str]) -> None:
        """Parse message file bytes, raising LocalizationIntegrityError on failure."""
        try:
            self.parse_message_file_bytes(buf, path)
        except I18nError as error:
            raise_integrity_error(
                "bundle", "parse_message_file_bytes", (error,), key=os.fspath(path)
            )

    def load_message_file(self, path: str | os.PathLike[str]) -> None:
        """Read a message file from disk and parse it.

        Raises:
            OSError: If the file cannot be read
            I18nError: As parse_message_file_bytes
        """
        self.parse_message_file_bytes(Path(path).read_bytes(), path)

    def must_load_message_file(self, path: str | os.PathLike[str]) -> None:
        """Load a message file, raising LocalizationIntegrityError on failure.

        OSError still propagates unchanged.
        """
        try:
            self.load_message_file(path)
        except I18nError as error:
            raise_integrity_error("bundle", "load_message_file", (error,), key=os.fspath(path))
