"""Hypothesis strategies for i18nbundle property-based testing.

Strategies are organized by domain:

- localization: language tags, preference strings, quantities, templates

Usage:
    from tests.strategies import language_tags, quantities
    from tests.strategies.localization import preference_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - language_tags, preference_strings, quantities, template_texts
"""

from .localization import (
    field_names,
    language_tags,
    message_ids,
    preference_strings,
    quantities,
    template_texts,
)

__all__ = [
    "field_names",
    "language_tags",
    "message_ids",
    "preference_strings",
    "quantities",
    "template_texts",
]
