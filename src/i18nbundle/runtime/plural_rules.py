"""CLDR plural rules using Babel.

Wraps babel.plural.PluralRule so that rules map Operands to a
PluralCategory. Built-in rules come from Babel's CLDR data; custom rules
are compiled by Babel from CLDR condition text in either the current or
the legacy syntax:

    i = 1 and v = 0
    n % 10 = 2..4 and n % 100 != 12..14
    i mod 10 in 2..4 and i mod 100 not in 12..14
    n within 0..2 and n is not 2

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import functools
import logging
from collections.abc import Callable, Iterator, Mapping, MutableMapping

from babel.core import UnknownLocaleError
from babel.plural import PluralRule as BabelPluralRule
from babel.plural import RuleError

from i18nbundle.constants import LANGUAGE_TAG_SEPARATORS, MAX_PLURAL_RULE_CACHE_SIZE
from i18nbundle.diagnostics import ErrorTemplate, PluralRuleSyntaxError
from i18nbundle.enums import PluralCategory
from i18nbundle.locale_utils import get_babel_locale, language_family

from .operands import Operands

__all__ = [
    "PluralRule",
    "PluralRuleTable",
    "cldr_plural_rule",
    "resolve_plural_category",
]

logger = logging.getLogger(__name__)

type PluralSelector = Callable[[Operands], PluralCategory]


class PluralRule:
    """Plural rule for one language family.

    Evaluated by Babel on the operands' Decimal n, so trailing fraction
    zeros count. OTHER is the implicit catch-all. Conditions are expected
    to be mutually exclusive, as CLDR rules are. A PluralRule never
    returns INVALID.

    Example:
        >>> rule = PluralRule.parse({"one": "i = 1 and v = 0"})
        >>> rule(Operands.from_quantity(1))
        <PluralCategory.ONE: 'one'>
        >>> rule(Operands.from_quantity("1.0"))
        <PluralCategory.OTHER: 'other'>
    """

    __slots__ = ("_rule", "_selector")

    def __init__(
        self,
        rule: BabelPluralRule | None = None,
        *,
        selector: PluralSelector | None = None,
    ) -> None:
        """Initialize from a Babel rule or a selector.

        Args:
            rule: Babel rule to evaluate; an empty rule when omitted
            selector: Callable deciding the category directly; used instead
                of the Babel rule when given
        """
        self._rule = rule if rule is not None else BabelPluralRule(())
        self._selector = selector

    @classmethod
    def parse(cls, rules: Mapping[str, str]) -> "PluralRule":
        """Compile a rule from CLDR condition text per category.

        An ``other`` entry is accepted and ignored. Sample annotations
        (``@integer``, ``@decimal``) are ignored.

        Args:
            rules: Mapping of category name to condition text

        Returns:
            Compiled PluralRule

        Raises:
            PluralRuleSyntaxError: For unknown categories or invalid text
        """
        conditions: dict[str, str] = {}
        for key, text in rules.items():
            category = PluralCategory.from_key(key)
            if category is None:
                reason = f"unknown plural category {key!r}"
                raise PluralRuleSyntaxError(ErrorTemplate.plural_rule_syntax(text, reason))
            if category is PluralCategory.OTHER:
                continue
            if not text.split("@", 1)[0].strip():
                reason = f"empty condition for {category}"
                raise PluralRuleSyntaxError(ErrorTemplate.plural_rule_syntax(text, reason))
            conditions[str(category)] = text

        try:
            rule = BabelPluralRule(conditions)
        except RuleError as e:
            source = "; ".join(f"{tag}: {text}" for tag, text in conditions.items())
            raise PluralRuleSyntaxError(ErrorTemplate.plural_rule_syntax(source, str(e))) from e
        return cls(rule)

    @classmethod
    def from_function(cls, selector: PluralSelector) -> "PluralRule":
        """Wrap a callable that selects the category itself.

        An INVALID result from the callable is treated as OTHER.
        """
        return cls(selector=selector)

    @property
    def categories(self) -> frozenset[PluralCategory]:
        """Categories this rule can select, OTHER included.

        Rules built from a function report every rendering category.
        """
        if self._selector is not None:
            return frozenset(PluralCategory.rendering_categories())
        return frozenset(PluralCategory(tag) for tag in self._rule.tags) | {PluralCategory.OTHER}

    def __call__(self, operands: Operands) -> PluralCategory:
        if self._selector is not None:
            category = self._selector(operands)
            return PluralCategory.OTHER if category is PluralCategory.INVALID else category
        return PluralCategory(self._rule(operands.n))

    def __repr__(self) -> str:
        if self._selector is not None:
            return f"PluralRule.from_function({self._selector!r})"
        return f"PluralRule.parse({dict(self._rule.rules)!r})"


@functools.lru_cache(maxsize=MAX_PLURAL_RULE_CACHE_SIZE)
def cldr_plural_rule(family: str) -> PluralRule | None:
    """Get the CLDR plural rule for a language family from Babel.

    Built once per family and cached. Thread-safe via lru_cache
    internal locking.

    Args:
        family: Primary language subtag (e.g., "en", "ru")

    Returns:
        Rule over Babel's plural_form, or None if Babel has no locale for
        the family

    Example:
        >>> cldr_plural_rule("ru")(Operands.from_quantity(22))
        <PluralCategory.FEW: 'few'>
    """
    try:
        locale = get_babel_locale(family)
    except (UnknownLocaleError, ValueError):
        logger.warning("No CLDR plural rule for language family %r", family)
        return None

    logger.debug("Loaded CLDR plural rule for %r", family)
    return PluralRule(locale.plural_form)


class PluralRuleTable(MutableMapping[str, PluralRule]):
    """Plural rules keyed by lowercase language tag.

    Explicitly registered rules take precedence. When built-in rules are
    enabled, a bare family tag (no separator) that was never registered
    also resolves to its CLDR rule. Deleting a tag masks its built-in rule
    until a rule is registered again.
    """

    __slots__ = ("_builtin", "_removed", "_rules")

    def __init__(self, *, builtin: bool = True) -> None:
        self._rules: dict[str, PluralRule] = {}
        self._removed: set[str] = set()
        self._builtin = builtin

    def __getitem__(self, language_tag: str) -> PluralRule:
        rule = self._rules.get(language_tag)
        if rule is not None:
            return rule
        if (
            self._builtin
            and language_tag not in self._removed
            and not LANGUAGE_TAG_SEPARATORS.intersection(language_tag)
        ):
            rule = cldr_plural_rule(language_family(language_tag))
            if rule is not None:
                return rule
        raise KeyError(language_tag)

    def __setitem__(self, language_tag: str, rule: PluralRule) -> None:
        self._rules[language_tag] = rule
        self._removed.discard(language_tag)

    def __delitem__(self, language_tag: str) -> None:
        if language_tag not in self:
            raise KeyError(language_tag)
        self._rules.pop(language_tag, None)
        self._removed.add(language_tag)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, language_tag: object) -> bool:
        if not isinstance(language_tag, str):
            return False
        try:
            self[language_tag]
        except KeyError:
            return False
        return True


def resolve_plural_category(
    rules: Mapping[str, PluralRule],
    language_tag: str,
    operands: Operands | None,
) -> PluralCategory:
    """Decide the plural category for a language and quantity.

    Args:
        rules: Plural rules keyed by language tag
        language_tag: Tag whose rule to apply (exact lookup)
        operands: Operands of the quantity, or None if there is no quantity

    Returns:
        OTHER when there is no quantity, INVALID when the tag has no rule,
        otherwise the rule's category

    Example:
        >>> table = PluralRuleTable()
        >>> resolve_plural_category(table, "en", Operands.from_quantity(1))
        <PluralCategory.ONE: 'one'>
        >>> resolve_plural_category(table, "en", None)
        <PluralCategory.OTHER: 'other'>
    """
    if operands is None:
        return PluralCategory.OTHER
    rule = rules.get(language_tag)
    if rule is None:
        return PluralCategory.INVALID
    return rule(operands)
