"""i18nbundle runtime package.

Provides plural operands and rules, message templates, and the Bundle store.

Python 3.13+.
"""

from .message import Message, MessageTemplate
from .operands import Operands, derive_operands
from .plural_rules import (
    PluralRule,
    PluralRuleTable,
    cldr_plural_rule,
    resolve_plural_category,
)
from .template import CompiledTemplate, template_fields

# Imported last: Bundle depends on the localization loading helpers, which
# in turn import the modules above.
from .bundle import Bundle  # noqa: E402, I001

__all__ = [
    "Bundle",
    "CompiledTemplate",
    "Message",
    "MessageTemplate",
    "Operands",
    "PluralRule",
    "PluralRuleTable",
    "cldr_plural_rule",
    "derive_operands",
    "resolve_plural_category",
    "template_fields",
]
