"""Messages and their compiled per-category templates.

A Message is the source form a developer writes in code: an id, an
optional description for translators, and text per plural category. A
MessageTemplate is the compiled form stored in a Bundle.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from i18nbundle.constants import DESCRIPTION_KEY
from i18nbundle.diagnostics import ErrorTemplate, I18nError, UnknownPluralCategoryError
from i18nbundle.enums import PluralCategory
from i18nbundle.integrity import raise_integrity_error

from .template import CompiledTemplate

__all__ = ["Message", "MessageTemplate"]


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """Compiled templates of one message, keyed by plural category.

    Attributes:
        id: Message identifier
        description: Context for translators (not rendered)
        templates: Compiled template per plural category; categories with
            no content are absent
    """

    id: str
    description: str = ""
    templates: Mapping[PluralCategory, CompiledTemplate] = field(default_factory=dict, hash=False)

    @classmethod
    def from_mapping(cls, message_id: str, data: Mapping[str, str]) -> "MessageTemplate":
        """Build a MessageTemplate from raw ``key -> text`` data.

        Keys are case-insensitive and must be ``description`` or a rendering
        plural category. Empty text means the category has no content.

        Args:
            message_id: Message identifier
            data: Raw message data, e.g. ``{"one": "...", "other": "..."}``

        Returns:
            Compiled MessageTemplate

        Raises:
            UnknownPluralCategoryError: If a key is not a known category
            TemplateSyntaxError: If a template fails to compile

        Example:
            >>> template = MessageTemplate.from_mapping("cats", {"other": "{{Count}} cats"})
            >>> template.render(PluralCategory.OTHER, {"Count": 3})
            '3 cats'
        """
        description = ""
        templates: dict[PluralCategory, CompiledTemplate] = {}
        for key, text in data.items():
            if key.lower() == DESCRIPTION_KEY:
                description = text
                continue
            category = PluralCategory.from_key(key)
            if category is None:
                raise UnknownPluralCategoryError(
                    ErrorTemplate.unknown_plural_category(key, message_id)
                )
            if text:
                templates[category] = CompiledTemplate.compile(text)
        return cls(id=message_id, description=description, templates=templates)

    @classmethod
    def must_from_mapping(cls, message_id: str, data: Mapping[str, str]) -> "MessageTemplate":
        """Build a MessageTemplate, raising LocalizationIntegrityError on failure.

        Intended for templates declared at import time, where bad data is a
        programming error.
        """
        try:
            return cls.from_mapping(message_id, data)
        except I18nError as error:
            raise_integrity_error(
                "message", "from_mapping", (error,), key=message_id, message_id=message_id
            )

    @property
    def categories(self) -> frozenset[PluralCategory]:
        """Categories that have content."""
        return frozenset(self.templates)

    def render(
        self, category: PluralCategory, fields: Mapping[str, object] | None = None
    ) -> str | None:
        """Render the template for a plural category.

        Args:
            category: Plural category to render
            fields: Template field values

        Returns:
            Rendered text, or None if the message has no content for the category
        """
        template = self.templates.get(category)
        if template is None:
            return None
        return template.render(fields)


@dataclass(frozen=True, slots=True)
class Message:
    """A message with its text for each plural category.

    Empty text means the message has no content for that category.

    Attributes:
        id: Message identifier
        description: Context for translators
        zero: Text for the "zero" category
        one: Text for the "one" category
        two: Text for the "two" category
        few: Text for the "few" category
        many: Text for the "many" category
        other: Text for the "other" category

    Example:
        >>> apples = Message(id="apples", one="One apple", other="{{Count}} apples")
    """

    id: str
    description: str = ""
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    def content(self, category: PluralCategory) -> str:
        """Text for a category ("" when absent or for INVALID)."""
        if category is PluralCategory.INVALID:
            return ""
        return str(getattr(self, category.value))

    def template(self) -> MessageTemplate:
        """Compile into a MessageTemplate, skipping categories with no text.

        Raises:
            TemplateSyntaxError: If a template fails to compile
        """
        data = {DESCRIPTION_KEY: self.description}
        for category in PluralCategory.rendering_categories():
            data[str(category)] = self.content(category)
        return MessageTemplate.from_mapping(self.id, data)
