"""i18nbundle - plural-aware message localization with language fallback.

Resolves a message id, an optional quantity and optional substitution data
into text in the best available language, choosing the CLDR plural form
for that language and quantity.

Public API:
    Bundle - Message templates, plural rules and message file loading
    Localizer - Fallback-chain resolution over a Bundle
    DefaultLocalizer - Localizer with default messages from source code
    Message - Message text per plural category
    MessageTemplate - Compiled message stored in a Bundle
    PluralCategory - CLDR plural categories
    PluralRule - Plural rule for a language family
    by_id / by_message - Request builders

Exceptions:
    I18nError - Base exception class
    LocalizationIntegrityError - Raised by the must_* operations

Submodules:
    i18nbundle.runtime - Operands, plural rules, templates, Bundle
    i18nbundle.localization - Localizers, requests, message file decoding
    i18nbundle.diagnostics - Error types, codes and formatting
    i18nbundle.locale_utils - Language tag expansion and Babel locales
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import I18nError
from .enums import PluralCategory
from .integrity import LocalizationIntegrityError
from .runtime import Bundle, Message, MessageTemplate, Operands, PluralRule
from .localization import (  # noqa: I001 - runtime must be imported before localization
    ByIdentifier,
    ByMessage,
    DefaultLocalizer,
    FallbackInfo,
    Localizer,
    by_id,
    by_message,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bundle",
    "ByIdentifier",
    "ByMessage",
    "DefaultLocalizer",
    "FallbackInfo",
    "I18nError",
    "LocalizationIntegrityError",
    "Localizer",
    "Message",
    "MessageTemplate",
    "Operands",
    "PluralCategory",
    "PluralRule",
    "__version__",
    "by_id",
    "by_message",
]
