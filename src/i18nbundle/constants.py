"""Shared constants for i18nbundle.

Centralized configuration constants used across the runtime and localization
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Language tags: Tag grammar shared by preference parsing and path discovery
- Message data: Raw message keys and the injected quantity field
- Cache limits: Memory bounds for Babel lookups
- Defaults: Fallback configuration values

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language tags
    "LANGUAGE_TAG_PATTERN",
    "LANGUAGE_TAG_SEPARATORS",
    # Message data
    "COUNT_FIELD",
    "DESCRIPTION_KEY",
    # Cache limits
    "MAX_PLURAL_RULE_CACHE_SIZE",
    # Defaults
    "DEFAULT_LANGUAGE_TAG",
    "DEFAULT_SYSTEM_LOCALE",
]

# ============================================================================
# LANGUAGE TAGS
# ============================================================================

# Matches language tags like en, en-US, en_GB and zh-Hans-CN.
# Every segment must have at least two letters, so stray single letters and
# digits (q=0.8 weights, "x" private-use singletons) are never captured.
# Matching is case-insensitive; callers lowercase the result.
LANGUAGE_TAG_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z]{2,}(?:[\-_][a-zA-Z]{2,})*")

# Characters that delimit subtags within a language tag.
LANGUAGE_TAG_SEPARATORS: frozenset[str] = frozenset("-_")

# ============================================================================
# MESSAGE DATA
# ============================================================================

# Template field populated with the caller's original quantity value.
# Template authors reference it as {{Count}}.
COUNT_FIELD: str = "Count"

# Raw message key holding translator-facing context rather than content.
DESCRIPTION_KEY: str = "description"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached CLDR plural rules compiled from Babel data.
# One entry per language family; CLDR defines rules for ~220 families.
MAX_PLURAL_RULE_CACHE_SIZE: int = 256

# ============================================================================
# DEFAULTS
# ============================================================================

# Language of default messages when DefaultLocalizer is not told otherwise.
DEFAULT_LANGUAGE_TAG: str = "en"

# Returned by get_system_locale() when the environment names no locale.
DEFAULT_SYSTEM_LOCALE: str = "en_US"
