"""Multi-language message resolution with fallback chains.

A Localizer walks a fixed chain of language tags, most preferred first,
and renders the first language that has non-empty content for a message.
DefaultLocalizer adds a last resort: default content supplied with the
request and pluralized under a fixed default language.

Resolution follows the (value, errors) convention: failures are returned,
never raised. The must_localize variants raise LocalizationIntegrityError
instead.

Resolution of one request:
    1. Normalize the request and project its data into template fields.
    2. Derive plural operands from the quantity.
    3. For each language tag: skip it when it has no template for the
       message, otherwise decide the plural category and render. The first
       non-empty rendering wins. A tag with templates but no plural rule
       aborts the whole resolution.
    4. Nothing rendered: ("", ()) for Localizer; DefaultLocalizer renders
       the request's default content.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nbundle.constants import COUNT_FIELD, DEFAULT_LANGUAGE_TAG
from i18nbundle.diagnostics import (
    DefaultMessageUnavailableError,
    ErrorTemplate,
    I18nError,
    InvalidInvocationError,
    InvalidQuantityError,
    PluralizationUnavailableError,
)
from i18nbundle.enums import PluralCategory
from i18nbundle.integrity import raise_integrity_error
from i18nbundle.locale_utils import (
    expand_language_preferences,
    get_system_locale,
    normalize_language_tag,
)
from i18nbundle.runtime.message import Message
from i18nbundle.runtime.operands import Operands, derive_operands
from i18nbundle.runtime.plural_rules import resolve_plural_category
from i18nbundle.runtime.template import template_fields

from .loading import FallbackInfo
from .requests import ByIdentifier, ByMessage, LocalizeRequest

if TYPE_CHECKING:
    from i18nbundle.runtime.bundle import Bundle

    from .types import LanguageTag, MessageId, Quantity

__all__ = ["DefaultLocalizer", "Localizer"]

logger = logging.getLogger(__name__)

type LocalizeResult = tuple[str, tuple[I18nError, ...]]


@dataclass(frozen=True, slots=True)
class _PreparedRequest:
    """A normalized request with its fields and operands computed once."""

    request: LocalizeRequest
    message_id: MessageId
    fields: dict[str, object]
    operands: Operands | None


class Localizer:
    """Resolves messages from a Bundle through a language fallback chain.

    Localizers are cheap; create one per request (e.g. from the
    Accept-Language header) and discard it.

    Example:
        >>> localizer = Localizer(bundle, "es-ES, en;q=0.8")
        >>> localizer.language_tags
        ('es-es', 'es', 'en')
        >>> text, errors = localizer.localize("PersonCats", count=2, data={"Name": "Nick"})
    """

    __slots__ = ("_bundle", "_language_tags", "_on_fallback")

    def __init__(
        self,
        bundle: Bundle,
        preferences: str | Iterable[str],
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize Localizer.

        Args:
            bundle: Bundle to resolve messages from
            preferences: Accept-Language style string (or several), in
                decreasing order of preference; weights are not re-sorted
            on_fallback: Called when a message resolves from a language
                other than the first preference
        """
        self._bundle = bundle
        self._language_tags = expand_language_preferences(preferences)
        self._on_fallback = on_fallback

    @classmethod
    def from_system_locale(
        cls,
        bundle: Bundle,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> Localizer:
        """Create a Localizer preferring the process locale (LC_ALL, LC_MESSAGES, LANG)."""
        return cls(bundle, get_system_locale(), on_fallback=on_fallback)

    @property
    def bundle(self) -> Bundle:
        """Bundle messages are resolved from."""
        return self._bundle

    @property
    def language_tags(self) -> tuple[LanguageTag, ...]:
        """Fallback chain, most preferred first (immutable)."""
        return self._language_tags

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"{type(self).__name__}(language_tags={self._language_tags!r})"

    def localize(
        self,
        request: str | LocalizeRequest,
        /,
        *,
        count: Quantity | None = None,
        data: object = None,
    ) -> LocalizeResult:
        """Resolve a message through the fallback chain.

        Args:
            request: Message id, or a ByIdentifier/ByMessage request
            count: Quantity selecting the plural form (message id only)
            data: Substitution data (message id only)

        Returns:
            Tuple of (text, errors). Text is "" when no language has
            content for the message; that is not an error.

        Example:
            >>> localizer.localize("PersonCats", count=1, data={"Name": "Nick"})
            ('Nick has 1 cat.', ())
        """
        return self._localize("localize", request, count, data)

    def must_localize(
        self,
        request: str | LocalizeRequest,
        /,
        *,
        count: Quantity | None = None,
        data: object = None,
    ) -> str:
        """Resolve a message, raising instead of returning errors.

        Raises:
            LocalizationIntegrityError: If resolution produced any error
        """
        text, errors = self._localize("must_localize", request, count, data)
        if errors:
            message_id = _request_message_id(request)
            raise_integrity_error(
                "localizer", "localize", errors, key=message_id, message_id=message_id
            )
        return text

    def _localize(
        self,
        operation: str,
        request: str | LocalizeRequest,
        count: Quantity | None,
        data: object,
    ) -> LocalizeResult:
        try:
            prepared = self._prepare(operation, request, count, data)
            text, language_tag = self._resolve(prepared)
        except I18nError as error:
            logger.warning("Failed to localize %r: %s", _request_message_id(request), error)
            return ("", (error,))

        if language_tag is not None:
            self._notify_fallback(prepared.message_id, language_tag, from_default=False)
        return (text, ())

    def _prepare(
        self,
        operation: str,
        request: object,
        count: Quantity | None,
        data: object,
    ) -> _PreparedRequest:
        """Normalize the request, project data and derive operands.

        Raises:
            InvalidInvocationError: For unusable requests or data
            InvalidQuantityError: For unusable quantities
        """
        match request:
            case str():
                request = ByIdentifier(request, count=count, data=data)
            case ByIdentifier() | ByMessage() if count is None and data is None:
                pass
            case ByIdentifier() | ByMessage():
                reason = "count and data belong in the request object"
                raise InvalidInvocationError(
                    ErrorTemplate.invalid_invocation(operation, (request, count, data), reason)
                )
            case _:
                reason = "expected a message id, ByIdentifier or ByMessage"
                raise InvalidInvocationError(
                    ErrorTemplate.invalid_invocation(operation, (request,), reason)
                )

        fields = template_fields(request.data)
        if request.count is not None:
            fields[COUNT_FIELD] = request.count
            operands = derive_operands(request.count)
        else:
            operands = _data_operands(request.message_id, fields.get(COUNT_FIELD))
        return _PreparedRequest(
            request=request,
            message_id=request.message_id,
            fields=fields,
            operands=operands,
        )

    def _resolve(self, prepared: _PreparedRequest) -> tuple[str, LanguageTag | None]:
        """Walk the fallback chain.

        Returns:
            Tuple of (text, tag that produced it); ("", None) when exhausted

        Raises:
            PluralizationUnavailableError: If a tag with templates has no rule
        """
        message_id = prepared.message_id
        for language_tag in self._language_tags:
            template = self._bundle.get_message_template(language_tag, message_id)
            if template is None:
                continue
            category = resolve_plural_category(
                self._bundle.plural_rules, language_tag, prepared.operands
            )
            if category is PluralCategory.INVALID:
                raise PluralizationUnavailableError(
                    ErrorTemplate.pluralization_unavailable(message_id, language_tag)
                )
            text = template.render(category, prepared.fields)
            logger.debug("Resolved %r in %s as %s: %r", message_id, language_tag, category, text)
            if text:
                return (text, language_tag)
        logger.debug("Message %r not found for %s", message_id, self._language_tags)
        return ("", None)

    def _notify_fallback(
        self, message_id: MessageId, resolved_language: LanguageTag, *, from_default: bool
    ) -> None:
        if self._on_fallback is None:
            return
        requested = self._language_tags[0] if self._language_tags else ""
        if resolved_language == requested and not from_default:
            return
        self._on_fallback(
            FallbackInfo(
                requested_language=requested,
                resolved_language=resolved_language,
                message_id=message_id,
                from_default=from_default,
            )
        )


class DefaultLocalizer(Localizer):
    """Localizer that falls back to default content from the request.

    When no preferred language has content for a message, the request's
    default content is rendered: ``ByIdentifier.default`` as the "other"
    text, or the categories of ``ByMessage.message``. The plural category
    for default content is decided by the rule of ``default_language_tag``;
    if the default content has no text for that category, its "other"
    text is used.

    Example:
        >>> localizer = DefaultLocalizer(bundle, "es", "en")
        >>> localizer.localize(by_id("HelloWorld", default="Hello World!"))
        ('Hola Mundo!', ())
    """

    __slots__ = ("_default_language_tag",)

    def __init__(
        self,
        bundle: Bundle,
        preferences: str | Iterable[str],
        default_language_tag: str = DEFAULT_LANGUAGE_TAG,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize DefaultLocalizer.

        Args:
            bundle: Bundle to resolve messages from
            preferences: Accept-Language style preference string(s)
            default_language_tag: Language of the default content
            on_fallback: Called when a message resolves from a language
                other than the first preference, or from default content
        """
        super().__init__(bundle, preferences, on_fallback=on_fallback)
        self._default_language_tag = normalize_language_tag(default_language_tag)

    @property
    def default_language_tag(self) -> LanguageTag:
        """Language whose plural rule applies to default content."""
        return self._default_language_tag

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"DefaultLocalizer(language_tags={self._language_tags!r}, "
            f"default_language_tag={self._default_language_tag!r})"
        )

    def _localize(
        self,
        operation: str,
        request: str | LocalizeRequest,
        count: Quantity | None,
        data: object,
    ) -> LocalizeResult:
        try:
            prepared = self._prepare(operation, request, count, data)
            text, language_tag = self._resolve(prepared)
            if language_tag is None:
                text = self._render_default(prepared)
        except I18nError as error:
            logger.warning("Failed to localize %r: %s", _request_message_id(request), error)
            return ("", (error,))

        if language_tag is None:
            self._notify_fallback(
                prepared.message_id, self._default_language_tag, from_default=True
            )
        else:
            self._notify_fallback(prepared.message_id, language_tag, from_default=False)
        return (text, ())

    def _render_default(self, prepared: _PreparedRequest) -> str:
        """Render the request's default content.

        Raises:
            PluralizationUnavailableError: If the default language has no rule
            DefaultMessageUnavailableError: If there is no usable default content
            TemplateSyntaxError: If default content fails to compile
        """
        message_id = prepared.message_id
        match prepared.request:
            case ByMessage(message=message):
                template = message.template()
            case ByIdentifier(default=str() as default) if default:
                template = Message(id=message_id, other=default).template()
            case _:
                template = None

        category = resolve_plural_category(
            self._bundle.plural_rules, self._default_language_tag, prepared.operands
        )
        if category is PluralCategory.INVALID:
            raise PluralizationUnavailableError(
                ErrorTemplate.pluralization_unavailable(message_id, self._default_language_tag)
            )

        text = template.render(category, prepared.fields) if template is not None else None
        if text is not None:
            logger.debug("Resolved %r from default content as %s", message_id, category)
            return text

        raise DefaultMessageUnavailableError(
            ErrorTemplate.default_message_unavailable(message_id, category)
        )


def _request_message_id(request: object) -> str:
    match request:
        case str():
            return request
        case ByIdentifier() | ByMessage():
            return request.message_id
        case _:
            return ""


def _data_operands(message_id: str, quantity: object) -> Operands | None:
    """Operands for a Count field found in caller data.

    An unusable Count in data means no quantity; the field still renders.
    """
    if quantity is None:
        return None
    try:
        return derive_operands(quantity)  # type: ignore[arg-type]
    except InvalidQuantityError:
        logger.debug("Ignoring non-numeric Count %r in data for %r", quantity, message_id)
        return None
