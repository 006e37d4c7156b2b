# uasift/__init__.py

from uasift.extensions import (
    BOTS,
    CLIS,
    CRAWLERS,
    EMAILS,
    FETCHERS,
    INAPPS,
    LIBRARIES,
    VEHICLES,
    UnknownExtensionError,
    get_extension,
)
from uasift.merger import extend_rules
from uasift.parser import UAParser, parse
from uasift.regexes import DEFAULT_RULES
from uasift.rules import BrowserType, Category, DeviceType, Field, PatternRule, ruleset

__version__ = "1.0.0"

__all__ = [
    "BOTS",
    "CLIS",
    "CRAWLERS",
    "EMAILS",
    "FETCHERS",
    "INAPPS",
    "LIBRARIES",
    "VEHICLES",
    "DEFAULT_RULES",
    "BrowserType",
    "Category",
    "DeviceType",
    "Field",
    "PatternRule",
    "UAParser",
    "UnknownExtensionError",
    "extend_rules",
    "get_extension",
    "parse",
    "ruleset",
]
