"""Enumerations for i18nbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["PluralCategory"]


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"

    Members are declared in CLDR order (zero, one, two, few, many, other).
    INVALID is a sentinel for "no plural rule for this language" and is never
    a rendering category.
    """

    ZERO = "zero"
    """Languages with a dedicated zero form (Latvian, Arabic, Welsh)."""

    ONE = "one"
    """Singular-like form: 1 in English, 1, 21, 31... in Russian."""

    TWO = "two"
    """Dual form (Arabic, Hebrew, Slovenian, Welsh)."""

    FEW = "few"
    """Paucal form: 2-4 in Polish and Czech."""

    MANY = "many"
    """Large-number form: 5-20 in Polish, 11-99 in Arabic."""

    OTHER = "other"
    """Universal fallback; every rule table reaches it."""

    INVALID = "invalid"
    """No plural rule is registered for the language."""

    @classmethod
    def rendering_categories(cls) -> tuple["PluralCategory", ...]:
        """Categories that may carry message content, in CLDR order."""
        return tuple(category for category in cls if category is not cls.INVALID)

    @classmethod
    def from_key(cls, key: str) -> "PluralCategory | None":
        """Look up a rendering category by raw message key.

        Keys are case-insensitive so that "One" in a TOML file and "one" in a
        JSON file name the same category.

        Args:
            key: Raw key from a message file or Message field name

        Returns:
            Matching category, or None for unrecognized keys and for "invalid"
        """
        try:
            category = cls(key.lower())
        except ValueError:
            return None
        if category is cls.INVALID:
            return None
        return category
