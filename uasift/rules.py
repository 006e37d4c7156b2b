# uasift/rules.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, NamedTuple, Optional, Sequence, Tuple, Union


class Category(str, Enum):
    BROWSER = "browser"
    CPU = "cpu"
    DEVICE = "device"
    ENGINE = "engine"
    OS = "os"


class Field(str, Enum):
    NAME = "name"
    VERSION = "version"
    TYPE = "type"
    VENDOR = "vendor"
    MODEL = "model"
    ARCHITECTURE = "architecture"


class BrowserType(str, Enum):
    """Non-ordinary browsers. Ordinary browsers carry no type."""
    BROWSER = "browser"
    CLI = "cli"
    CRAWLER = "crawler"
    EMAIL = "email"
    FETCHER = "fetcher"
    INAPP = "inapp"
    LIBRARY = "library"
    VEHICLE = "vehicle"


class DeviceType(str, Enum):
    """Device form factors. Desktops carry no type."""
    CONSOLE = "console"
    EMBEDDED = "embedded"
    MOBILE = "mobile"
    SMARTTV = "smarttv"
    TABLET = "tablet"
    WEARABLE = "wearable"
    XR = "xr"


# Fields each category may produce, in output order
CATEGORY_FIELDS: dict[Category, Tuple[Field, ...]] = {
    Category.BROWSER: (Field.NAME, Field.VERSION, Field.TYPE),
    Category.CPU: (Field.ARCHITECTURE,),
    Category.DEVICE: (Field.VENDOR, Field.MODEL, Field.TYPE),
    Category.ENGINE: (Field.NAME, Field.VERSION),
    Category.OS: (Field.NAME, Field.VERSION),
}

# Longest user-agent that is classified; anything beyond is cut off
UA_MAX_LENGTH = 500

_TRAILING_SEPARATORS = "._- "
_UNDERSCORE_VERSION = re.compile(r"^\d+(?:_\d+)+$")
_LEADING_DIGITS = re.compile(r"^\d+")


class MatchOutcome(NamedTuple):
    matched: bool
    groups: Tuple[Optional[str], ...] = ()


NO_MATCH = MatchOutcome(False)


def normalize_version(value: str) -> str:
    """Drop trailing separators, rewrite 10_15_7 style versions as 10.15.7"""
    value = value.rstrip(_TRAILING_SEPARATORS)
    if _UNDERSCORE_VERSION.match(value):
        value = value.replace("_", ".")
    return value


def major_version(version: Optional[str]) -> Optional[str]:
    """Leading run of digits of a version string, if any"""
    if not version:
        return None
    match = _LEADING_DIGITS.match(version)
    return match.group(0) if match else None


@dataclass(frozen=True)
class FieldSpec:
    """
    One template entry: which field to fill and where its value comes from.

    `group` is a 1-based capture index, `literal` a fixed value. When both
    are None the field resolves to None.
    """
    target: Field
    group: Optional[int] = None
    literal: Optional[str] = None
    aliases: Optional[Mapping[str, str]] = None
    replace: Optional[Tuple[re.Pattern, str]] = None
    lower: bool = False

    def resolve(self, groups: Sequence[Optional[str]]) -> Optional[str]:
        if self.group is not None:
            # Index past the last group -> undefined, never an error
            value = groups[self.group - 1] if 0 < self.group <= len(groups) else None
        else:
            value = self.literal

        if value is None:
            return None

        value = value.strip()
        if self.replace is not None:
            pattern, repl = self.replace
            value = pattern.sub(repl, value).strip()
        if self.lower:
            value = value.lower()
        if self.aliases:
            value = self.aliases.get(value.lower(), value)
        if self.target is Field.VERSION:
            value = normalize_version(value)

        return value or None


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern
    template: Tuple[Optional[FieldSpec], ...] = ()

    def match(self, identifier: str) -> MatchOutcome:
        found = self.pattern.search(identifier)
        if found is None:
            return NO_MATCH
        return MatchOutcome(True, found.groups())

    def extract(self, groups: Sequence[Optional[str]], category: Category) -> dict:
        return extract(groups, self.template, category)


def empty_fields(category: Category) -> dict:
    return {f.value: None for f in CATEGORY_FIELDS[category]}


def extract(
    groups: Sequence[Optional[str]],
    template: Sequence[Optional[FieldSpec]],
    category: Category,
) -> dict:
    """Build the field map for one matched rule"""
    fields = empty_fields(category)
    allowed = CATEGORY_FIELDS[category]

    for spec in template:
        if spec is None or spec.target not in allowed:
            continue
        fields[spec.target.value] = spec.resolve(groups)

    return fields


# ---------------------------------------------------------------------------
# Compact rule builder for the data modules
# ---------------------------------------------------------------------------

TemplateItem = Union[None, Field, Tuple[Field, object]]


def _literal(value: object) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def build_template(items: Sequence[TemplateItem]) -> Tuple[Optional[FieldSpec], ...]:
    """
    Turn positional template items into FieldSpecs.

    A bare Field takes the next capture group, (Field, str) is a literal,
    (Field, mapping) takes the next group through an alias table,
    (Field, (regex, repl)) takes the next group with a substitution,
    (Field, str.lower) takes the next group lower-cased and None skips a group.
    """
    specs: list[Optional[FieldSpec]] = []
    group = 0

    for item in items:
        if item is None:
            group += 1
            continue

        if isinstance(item, Field):
            group += 1
            specs.append(FieldSpec(item, group=group))
            continue

        if not (isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], Field)):
            raise ValueError(f"Invalid template item: {item!r}")

        target, source = item
        if isinstance(source, (str, Enum)):
            specs.append(FieldSpec(target, literal=_literal(source)))
        elif isinstance(source, Mapping):
            group += 1
            aliases = {str(k).lower(): v for k, v in source.items()}
            specs.append(FieldSpec(target, group=group, aliases=aliases))
        elif isinstance(source, tuple) and len(source) == 2:
            group += 1
            pattern, repl = source
            if isinstance(pattern, str):
                pattern = re.compile(pattern)
            specs.append(FieldSpec(target, group=group, replace=(pattern, repl)))
        elif source is str.lower:
            group += 1
            specs.append(FieldSpec(target, group=group, lower=True))
        else:
            raise ValueError(f"Invalid template source for {target.value}: {source!r}")

    return tuple(specs)


def ruleset(*pairs, flags: int = re.IGNORECASE) -> Tuple[PatternRule, ...]:
    """
    Build an ordered rule tuple from (patterns, template) pairs:

        ruleset(
            [r"(wget|curl)/([\\w.]+)"], [Field.NAME, Field.VERSION],
            [r"\\bcrios/([\\w.]+)"], [Field.VERSION, (Field.NAME, "Chrome")],
        )
    """
    if len(pairs) % 2:
        raise ValueError("ruleset() takes patterns/template pairs")

    rules: list[PatternRule] = []
    for patterns, items in zip(pairs[::2], pairs[1::2]):
        if isinstance(patterns, str):
            patterns = [patterns]
        template = build_template(items)
        for pattern in patterns:
            rules.append(PatternRule(re.compile(pattern, flags), template))

    return tuple(rules)
