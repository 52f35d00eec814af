"""CLDR plural operands using Babel.

Converts a caller-supplied quantity into the operands CLDR plural rules
are written against:

    n  absolute value of the source number
    i  integer digits of n
    v  number of visible fraction digits, with trailing zeros
    w  number of visible fraction digits, without trailing zeros
    f  visible fraction digits, with trailing zeros, as an integer
    t  visible fraction digits, without trailing zeros, as an integer
    c  compact decimal exponent (always 0; exponent notation is rejected)

The visible form of the number matters: "1" and "1.0" have different
operands and can select different plural categories. Every quantity is
turned into a Decimal that keeps its trailing zeros and handed to Babel's
extract_operands.

Python 3.13+. Depends on Babel.

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from babel.plural import extract_operands

from i18nbundle.diagnostics import ErrorTemplate, InvalidQuantityError

__all__ = ["Operands", "derive_operands"]

# Optional sign, integer digits, optional fraction part (which may be empty).
_DECIMAL_PATTERN = re.compile(r"[+-]?\d+(?:\.\d*)?")


@dataclass(frozen=True, slots=True)
class Operands:
    """CLDR plural operands for one quantity.

    Attributes:
        n: Absolute value of the number, trailing fraction zeros kept
        i: Integer digits of n
        v: Visible fraction digit count, trailing zeros included
        w: Visible fraction digit count, trailing zeros excluded
        f: Visible fraction digits as an integer, trailing zeros included
        t: Visible fraction digits as an integer, trailing zeros excluded
        c: Compact decimal exponent
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int
    c: int = 0

    @property
    def e(self) -> int:
        """Deprecated CLDR synonym for c."""
        return self.c

    @classmethod
    def from_quantity(cls, quantity: int | float | Decimal | str) -> "Operands":
        """Derive operands from an integer or a decimal number.

        Args:
            quantity: int, finite float, finite Decimal, or a string of the
                form ``[+-]digits[.digits]``

        Returns:
            Operands for the quantity

        Raises:
            InvalidQuantityError: For any other value

        Example:
            >>> Operands.from_quantity("1.70")
            Operands(n=Decimal('1.70'), i=1, v=2, w=1, f=70, t=7, c=0)
        """
        match quantity:
            case bool():
                pass
            case int():
                return cls.from_decimal(Decimal(quantity))
            case str():
                return cls._from_string(quantity)
            case Decimal() if quantity.is_finite():
                return cls._from_string(format(quantity, "f"), original=quantity)
            case float() if math.isfinite(quantity):
                return cls._from_string(repr(quantity), original=quantity)
        raise InvalidQuantityError(ErrorTemplate.invalid_quantity(quantity), quantity=quantity)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Operands":
        """Derive operands from a Decimal as Babel's extract_operands sees it.

        The Decimal's exponent decides the visible fraction digits, so
        Decimal("1.0") and Decimal("1") differ.
        """
        n, i, v, w, f, t, c, _ = extract_operands(value)
        return cls(n=Decimal(n), i=i, v=v, w=w, f=f, t=t, c=c)

    @classmethod
    def _from_string(cls, text: str, original: object = None) -> "Operands":
        if _DECIMAL_PATTERN.fullmatch(text) is None:
            # repr() of large or tiny floats uses exponent notation
            rejected = text if original is None else original
            raise InvalidQuantityError(ErrorTemplate.invalid_quantity(rejected), quantity=rejected)
        return cls.from_decimal(Decimal(text))


def derive_operands(quantity: int | float | Decimal | str | None) -> Operands | None:
    """Derive plural operands, passing through an absent quantity.

    Args:
        quantity: Quantity as accepted by Operands.from_quantity, or None

    Returns:
        Operands, or None when no quantity was supplied

    Raises:
        InvalidQuantityError: If the quantity cannot be interpreted
    """
    if quantity is None:
        return None
    return Operands.from_quantity(quantity)
