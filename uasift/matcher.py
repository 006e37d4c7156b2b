# uasift/matcher.py

from typing import Optional, Sequence
from uasift.rules import Category, PatternRule, empty_fields, major_version


def classify(
    identifier: Optional[str],
    rules: Sequence[PatternRule],
    category: Category,
) -> dict:
    """
    Run one category's rules against the identifier.

    Rules are tried in table order - first match wins, however generic it
    is. No match gives every field as None.
    """
    fields = empty_fields(category)

    if identifier:
        for rule in rules:
            outcome = rule.match(identifier)
            if outcome.matched:
                fields = rule.extract(outcome.groups, category)
                break

    if category is Category.BROWSER:
        fields["major"] = major_version(fields["version"])

    return fields
