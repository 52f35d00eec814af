"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Bundle and Localizer call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from decimal import Decimal

__all__ = [
    "LanguageTag",
    "MessageId",
    "Quantity",
    "UnmarshalFunc",
]

type MessageId = str
"""Identifier for a message (e.g., 'PersonCats', 'HelloWorld')."""

type LanguageTag = str
"""Lowercase language tag with its separators (e.g., 'en', 'en-us', 'zh_hant')."""

type Quantity = int | float | Decimal | str
"""Number selecting the plural form; strings keep their visible fraction digits."""

type UnmarshalFunc = Callable[[bytes], object]
"""Decodes message file bytes into raw message data."""
