"""Language tag utilities.

Expands language preference strings into ordered fallback chains, extracts
tags from message file paths, and converts tags to the POSIX form Babel
expects.

Tags are compared in lowercase with their separators kept as written, so
``en-US`` and ``en_US`` are distinct tags that share the family ``en``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from .constants import (
    DEFAULT_SYSTEM_LOCALE,
    LANGUAGE_TAG_PATTERN,
    LANGUAGE_TAG_SEPARATORS,
)
from .diagnostics import ErrorTemplate, NoLanguageTagError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale

__all__ = [
    "expand_language_preferences",
    "expand_language_tag",
    "extract_language_tag",
    "get_babel_locale",
    "get_system_locale",
    "language_family",
    "normalize_language_tag",
    "normalize_locale",
]


def normalize_language_tag(language_tag: str) -> str:
    """Lowercase a language tag, keeping its separators.

    Example:
        >>> normalize_language_tag("en-US")
        'en-us'
    """
    return language_tag.lower()


def language_family(language_tag: str) -> str:
    """Return the primary subtag of a language tag.

    The family is everything before the first ``-`` or ``_``.

    Example:
        >>> language_family("zh_Hant-TW")
        'zh'
    """
    for index, char in enumerate(language_tag):
        if char in LANGUAGE_TAG_SEPARATORS:
            return language_tag[:index]
    return language_tag


def expand_language_tag(language_tag: str) -> list[str]:
    """Expand one tag into itself followed by its proper prefixes.

    Each prefix is produced by stripping the last separator-delimited
    segment, most specific first. The tag is lowercased.

    Args:
        language_tag: A single language tag

    Returns:
        The tag and its prefixes

    Example:
        >>> expand_language_tag("zh-Hant-TW")
        ['zh-hant-tw', 'zh-hant', 'zh']
    """
    tag = normalize_language_tag(language_tag)
    expanded = [tag]
    for index in range(len(tag) - 1, 0, -1):
        if tag[index] in LANGUAGE_TAG_SEPARATORS:
            expanded.append(tag[:index])
    return expanded


def expand_language_preferences(preferences: str | Iterable[str]) -> tuple[str, ...]:
    """Parse a language preference string into an ordered fallback chain.

    Every run shaped like a language tag is extracted, lowercased and
    expanded into its prefixes. Expansions are concatenated in input order
    and de-duplicated keeping first occurrences. Quality weights such as
    ``q=0.8`` are not used for ordering; their letters are too short to
    form a tag.

    Args:
        preferences: An Accept-Language style string, or several of them

    Returns:
        Tuple of language tags, most specific first

    Example:
        >>> expand_language_preferences("en-US,fr;q=0.8")
        ('en-us', 'en', 'fr')
        >>> expand_language_preferences("x-aa-bb-cc-dd-x")
        ('aa-bb-cc-dd', 'aa-bb-cc', 'aa-bb', 'aa')
    """
    sources = [preferences] if isinstance(preferences, str) else list(preferences)
    seen: dict[str, None] = {}
    for source in sources:
        for match in LANGUAGE_TAG_PATTERN.finditer(source):
            for tag in expand_language_tag(match.group(0)):
                seen.setdefault(tag, None)
    return tuple(seen)


def extract_language_tag(text: str) -> str:
    """Return the last language-tag-shaped run in text.

    Used to discover the language of a message file from its path, e.g.
    ``locales/en-US.json`` (with the format suffix already removed).

    Args:
        text: Text to search

    Returns:
        The last matching tag, as written

    Raises:
        NoLanguageTagError: If text contains no tag-shaped run
    """
    matches = LANGUAGE_TAG_PATTERN.findall(text)
    if not matches:
        raise NoLanguageTagError(ErrorTemplate.no_language_tag(text))
    return matches[-1]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the process locale from environment variables.

    Detection order: ``LC_ALL``, ``LC_MESSAGES``, ``LANG``. The encoding
    suffix (``.UTF-8``) and modifiers (``@euro``) are stripped, and the
    ``C``/``POSIX`` pseudo-locales are ignored.

    Returns:
        Detected locale code, or "en_US" if none is set

    Example:
        >>> import os
        >>> os.environ["LC_ALL"] = "de_DE.UTF-8"
        >>> get_system_locale()
        'de_DE'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "")
        locale_code = value.split(".")[0].split("@")[0]
        if locale_code and locale_code not in ("C", "POSIX"):
            return locale_code
    return DEFAULT_SYSTEM_LOCALE
