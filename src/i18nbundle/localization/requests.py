"""Localization request variants.

A request names what to localize: a message id with an optional literal
default (ByIdentifier), or a Message whose categories double as the
default content (ByMessage). Both carry the quantity and substitution data
for the call.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from i18nbundle.runtime.message import Message

from .types import MessageId, Quantity

__all__ = [
    "ByIdentifier",
    "ByMessage",
    "LocalizeRequest",
    "by_id",
    "by_message",
]


@dataclass(frozen=True, slots=True)
class ByIdentifier:
    """Localize a message by id.

    Attributes:
        message_id: Message identifier
        default: Literal "other" text used by DefaultLocalizer when no
            preferred language has the message
        count: Quantity selecting the plural form
        data: Substitution data (mapping, dataclass, named tuple or an
            object with template_fields())
    """

    message_id: MessageId
    default: str | None = None
    count: Quantity | None = None
    data: object = None


@dataclass(frozen=True, slots=True)
class ByMessage:
    """Localize a Message, using its own text as the default content.

    Attributes:
        message: The message; its id is looked up in the bundle
        count: Quantity selecting the plural form
        data: Substitution data
    """

    message: Message
    count: Quantity | None = None
    data: object = None

    @property
    def message_id(self) -> MessageId:
        """Id of the wrapped message."""
        return self.message.id


type LocalizeRequest = ByIdentifier | ByMessage


def by_id(
    message_id: MessageId,
    *,
    default: str | None = None,
    count: Quantity | None = None,
    data: object = None,
) -> ByIdentifier:
    """Build a ByIdentifier request.

    Example:
        >>> by_id("PersonCats", count=2, data={"Name": "Nick"})
        ByIdentifier(message_id='PersonCats', default=None, count=2, data={'Name': 'Nick'})
    """
    return ByIdentifier(message_id, default=default, count=count, data=data)


def by_message(
    message: Message, *, count: Quantity | None = None, data: object = None
) -> ByMessage:
    """Build a ByMessage request."""
    return ByMessage(message, count=count, data=data)
