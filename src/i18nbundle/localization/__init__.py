"""Multi-language localization package.

Provides the localization stack on top of Bundle: type aliases, message
file decoding, request variants and the fallback-chain localizers.

Submodules:
    types     - PEP 695 type aliases (MessageId, LanguageTag, Quantity, UnmarshalFunc)
    loading   - Unmarshaler registry, message file decoding, FallbackInfo
    requests  - ByIdentifier, ByMessage and their builders
    localizer - Localizer and DefaultLocalizer

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nbundle.localization.loading import (
    FallbackInfo,
    decode_message_file,
    default_unmarshalers,
    parse_format,
    parse_raw_messages,
)
from i18nbundle.localization.requests import (
    ByIdentifier,
    ByMessage,
    LocalizeRequest,
    by_id,
    by_message,
)
from i18nbundle.localization.localizer import DefaultLocalizer, Localizer
from i18nbundle.localization.types import LanguageTag, MessageId, Quantity, UnmarshalFunc

__all__ = [
    # Localizers
    "Localizer",
    "DefaultLocalizer",
    # Requests
    "ByIdentifier",
    "ByMessage",
    "LocalizeRequest",
    "by_id",
    "by_message",
    # Message files
    "decode_message_file",
    "default_unmarshalers",
    "parse_format",
    "parse_raw_messages",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "LanguageTag",
    "MessageId",
    "Quantity",
    "UnmarshalFunc",
]
