# uasift/safety.py

"""
Static check that rule patterns cannot backtrack super-linearly.

Same rule as the `safe-regex` package: a pattern is rejected when a
repetition is nested inside another repetition (star height > 1) or when it
holds more than REPETITION_LIMIT repetitions. Every repetition counts,
`?` and `{0,1}` included: `(?:a|a?)+` backtracks exponentially.
"""

import re
# Private parser modules, layout as of CPython 3.11 to 3.14
from re import _constants as sre_constants
from re import _parser as sre_parse
from typing import Iterable, List, Mapping, Sequence, Tuple, Union
from uasift.rules import Category, PatternRule
import logging

logger = logging.getLogger(__name__)

REPETITION_LIMIT = 25

_REPEATS = (
    sre_constants.MAX_REPEAT,
    sre_constants.MIN_REPEAT,
    sre_constants.POSSESSIVE_REPEAT,
)


def is_linear(pattern: Union[str, re.Pattern], limit: int = REPETITION_LIMIT) -> bool:
    """True when the pattern has star height <= 1 and at most `limit` repetitions"""
    flags = 0
    if isinstance(pattern, re.Pattern):
        flags = pattern.flags
        pattern = pattern.pattern

    repetitions = 0

    def walk(subpattern, height: int) -> bool:
        nonlocal repetitions

        for op, av in subpattern:
            if op in _REPEATS:
                repetitions += 1
                if height >= 1 or repetitions > limit:
                    return False
                if not walk(av[2], height + 1):
                    return False
            elif op is sre_constants.SUBPATTERN:
                if not walk(av[3], height):
                    return False
            elif op is sre_constants.BRANCH:
                if not all(walk(branch, height) for branch in av[1]):
                    return False
            elif op in (sre_constants.ASSERT, sre_constants.ASSERT_NOT):
                if not walk(av[1], height):
                    return False
            elif op is sre_constants.ATOMIC_GROUP:
                if not walk(av, height):
                    return False
            elif op is sre_constants.GROUPREF_EXISTS:
                _, yes, no = av
                if not walk(yes, height) or (no is not None and not walk(no, height)):
                    return False

        return True

    return walk(sre_parse.parse(pattern, flags), 0)


def iter_patterns(
    tables: Iterable[Mapping[Category, Sequence[PatternRule]]],
) -> Iterable[Tuple[Category, re.Pattern]]:
    for table in tables:
        for category, rules in table.items():
            for rule in rules:
                yield category, rule.pattern


def find_unsafe_patterns(
    tables: Iterable[Mapping[Category, Sequence[PatternRule]]],
) -> List[Tuple[Category, str]]:
    """Every (category, pattern) across the given rule tables that fails is_linear()"""
    return [
        (category, pattern.pattern)
        for category, pattern in iter_patterns(tables)
        if not is_linear(pattern)
    ]


def audit_rules(tables: Iterable[Mapping[Category, Sequence[PatternRule]]]) -> bool:
    """Log every unsafe pattern; True when all are linear-time"""
    tables = list(tables)
    unsafe = find_unsafe_patterns(tables)

    for category, pattern in unsafe:
        logger.warning(f"Unsafe {category.value} pattern (super-linear backtracking): {pattern}")

    total = sum(1 for _ in iter_patterns(tables))
    if unsafe:
        logger.error(f"Rule audit failed: {len(unsafe)} of {total} patterns are unsafe")
    else:
        logger.info(f"Rule audit passed: {total} patterns checked")

    return not unsafe
