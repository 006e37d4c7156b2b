# uasift/merger.py

from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Tuple, Union
from uasift.rules import Category, PatternRule
import logging

logger = logging.getLogger(__name__)

RuleTables = Mapping[Category, Tuple[PatternRule, ...]]
Extension = Mapping[Union[Category, str], Sequence[PatternRule]]
Extensions = Union[Extension, Sequence[Extension]]


def _to_category(key) -> Union[Category, None]:
    if isinstance(key, Category):
        return key
    try:
        return Category(str(key).lower())
    except ValueError:
        return None


def normalize_extension(extension: Extension) -> Dict[Category, Tuple[PatternRule, ...]]:
    """
    Validate one extension bundle into a Category-keyed table.

    Unknown categories are skipped so bundles written for a newer or older
    rule layout still load. Anything that is not a PatternRule is a
    configuration error.
    """
    table: Dict[Category, Tuple[PatternRule, ...]] = {}

    for key, rules in extension.items():
        category = _to_category(key)
        if category is None:
            logger.debug(f"Ignoring rules for unknown category {key!r}")
            continue

        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, PatternRule):
                raise TypeError(
                    f"Extension rules for {category.value} must be PatternRule, "
                    f"got {type(rule).__name__}"
                )
        table[category] = rules

    return table


def combine_extensions(extensions: Sequence[Extension]) -> Dict[Category, Tuple[PatternRule, ...]]:
    """Merge bundles left to right, appending later bundles within a category"""
    combined: Dict[Category, Tuple[PatternRule, ...]] = {}

    for extension in extensions:
        for category, rules in normalize_extension(extension).items():
            combined[category] = combined.get(category, ()) + rules

    return combined


def extend_rules(
    defaults: RuleTables,
    extensions: Union[Extensions, None] = None,
    prepend: bool = False,
) -> RuleTables:
    """
    Derive an effective rule table from the defaults.

    A single mapping replaces the categories it names; a sequence of
    mappings is combined first (see combine_extensions). With prepend=True
    the extension rules are spliced in front of the defaults instead.
    The defaults are never modified.
    """
    if not extensions:
        overrides: Dict[Category, Tuple[PatternRule, ...]] = {}
    elif isinstance(extensions, Mapping):
        overrides = normalize_extension(extensions)
    else:
        overrides = combine_extensions(extensions)

    effective = {}
    for category in Category:
        base = tuple(defaults.get(category, ()))
        if category not in overrides:
            effective[category] = base
        elif prepend:
            effective[category] = overrides[category] + base
        else:
            effective[category] = overrides[category]

    if overrides:
        logger.debug(
            f"Extended rules for {', '.join(c.value for c in overrides)} "
            f"({'prepend' if prepend else 'replace'})"
        )

    return MappingProxyType(effective)
