# uasift/parser.py

from typing import Callable, Optional
from uasift.matcher import classify
from uasift.merger import Extensions, RuleTables, extend_rules
from uasift.regexes import DEFAULT_RULES
from uasift.rules import UA_MAX_LENGTH, Category
from uasift.schemas import BrowserInfo, CPUInfo, DeviceInfo, EngineInfo, OSInfo, ParseResult

UAProvider = Callable[[], Optional[str]]


class UAParser:
    """
    User-agent classifier.

    Holds the current user-agent and the effective rule tables. Nothing is
    cached: every getter classifies the current user-agent again, so a
    set_ua() is visible to all later calls.

        parser = UAParser(extensions=[CRAWLERS, CLIS])
        parser.set_ua("Wget/1.21.1").get_browser()
        # BrowserInfo(name='Wget', version='1.21.1', major='1', type='cli')
    """

    def __init__(
        self,
        ua: Optional[str] = None,
        extensions: Optional[Extensions] = None,
        *,
        prepend: bool = False,
        rules: Optional[RuleTables] = None,
        ua_provider: Optional[UAProvider] = None,
        max_length: int = UA_MAX_LENGTH,
    ):
        self._max_length = max_length

        if rules is None:
            rules = extend_rules(DEFAULT_RULES, extensions, prepend=prepend)
        elif extensions:
            # An explicit table replaces the defaults as the base being extended
            rules = extend_rules(rules, extensions, prepend=prepend)
        self._rules = rules

        # No explicit user-agent - fall back to whatever the host provides
        if ua is None and ua_provider is not None:
            ua = ua_provider()

        self._ua = ""
        self.set_ua(ua)

    def __repr__(self) -> str:
        return f"UAParser(ua={self._ua!r})"

    @property
    def rules(self) -> RuleTables:
        return self._rules

    def get_ua(self) -> str:
        return self._ua

    def set_ua(self, ua: Optional[str]) -> "UAParser":
        if not isinstance(ua, str):
            ua = ""
        self._ua = ua[:self._max_length] if len(ua) > self._max_length else ua
        return self

    def _classify(self, category: Category) -> dict:
        return classify(self._ua, self._rules.get(category, ()), category)

    def get_browser(self) -> BrowserInfo:
        return BrowserInfo(**self._classify(Category.BROWSER))

    def get_cpu(self) -> CPUInfo:
        return CPUInfo(**self._classify(Category.CPU))

    def get_device(self) -> DeviceInfo:
        return DeviceInfo(**self._classify(Category.DEVICE))

    def get_engine(self) -> EngineInfo:
        return EngineInfo(**self._classify(Category.ENGINE))

    def get_os(self) -> OSInfo:
        return OSInfo(**self._classify(Category.OS))

    def get_result(self) -> ParseResult:
        return ParseResult(
            ua=self._ua,
            browser=self.get_browser(),
            cpu=self.get_cpu(),
            device=self.get_device(),
            engine=self.get_engine(),
            os=self.get_os(),
        )


def parse(
    ua: Optional[str] = None,
    extensions: Optional[Extensions] = None,
    **kwargs,
) -> ParseResult:
    """One-shot classification: UAParser(ua, extensions, ...).get_result()"""
    return UAParser(ua, extensions, **kwargs).get_result()
