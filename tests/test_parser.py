import pytest

from conftest import (
    CHROME_SAMSUNG,
    CHROME_WINDOWS,
    EDGE_WINDOWS,
    FIREFOX_LINUX,
    SAFARI_IPHONE,
)
from uasift.parser import UAParser, parse
from uasift.rules import Category, Field, ruleset
from uasift.schemas import BrowserInfo, ParseResult

EMPTY_BROWSER = {"name": None, "version": None, "major": None, "type": None}


class TestDefaults:
    def test_chrome_on_windows(self):
        result = parse(CHROME_WINDOWS)
        assert result.browser.model_dump() == {
            "name": "Chrome",
            "version": "120.0.0.0",
            "major": "120",
            "type": None,
        }
        assert result.engine.model_dump() == {"name": "Blink", "version": "120.0.0.0"}
        assert result.os.model_dump() == {"name": "Windows", "version": "10"}
        assert result.cpu.architecture == "amd64"
        assert result.device.model_dump() == {"vendor": None, "model": None, "type": None}

    def test_edge_before_chrome(self):
        browser = parse(EDGE_WINDOWS).browser
        assert browser.name == "Edge"
        assert browser.version == "120.0.2210.91"

    def test_safari_on_iphone(self):
        result = parse(SAFARI_IPHONE)
        assert result.browser.name == "Mobile Safari"
        assert result.browser.version == "17.1.2"
        assert result.os.model_dump() == {"name": "iOS", "version": "17.1.2"}
        assert result.device.model_dump() == {"vendor": "Apple", "model": "iPhone", "type": "mobile"}
        assert result.engine.model_dump() == {"name": "WebKit", "version": "605.1.15"}
        assert result.cpu.architecture is None

    def test_firefox_on_linux(self):
        result = parse(FIREFOX_LINUX)
        assert result.browser.name == "Firefox"
        assert result.browser.major == "115"
        assert result.engine.model_dump() == {"name": "Gecko", "version": "109.0"}
        assert result.os.name == "Linux"
        assert result.cpu.architecture == "amd64"

    def test_windows_nt_351(self):
        result = parse("Mozilla/4.0 (compatible; MSIE 3.0; Windows NT3.51)")
        assert result.os.model_dump() == {"name": "Windows", "version": "NT 3.11"}

    def test_ubuntu_version(self):
        result = parse("Mozilla/5.0 (X11; Ubuntu/22.04; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/115.0")
        assert result.os.model_dump() == {"name": "Ubuntu", "version": "22.04"}
        result = parse(FIREFOX_LINUX.replace("X11;", "X11; Ubuntu;"))
        assert result.os.model_dump() == {"name": "Ubuntu", "version": None}

    def test_chrome_on_samsung(self):
        result = parse(CHROME_SAMSUNG)
        assert result.browser.name == "Chrome"
        assert result.os.model_dump() == {"name": "Android", "version": "13"}
        assert result.device.model_dump() == {"vendor": "Samsung", "model": "SM-S911B", "type": "mobile"}


class TestUAParser:
    def test_set_ua_is_chainable(self):
        parser = UAParser()
        assert parser.set_ua(FIREFOX_LINUX) is parser
        assert parser.get_ua() == FIREFOX_LINUX

    def test_getters_follow_set_ua(self):
        parser = UAParser(CHROME_WINDOWS)
        assert parser.get_browser().name == "Chrome"
        parser.set_ua(FIREFOX_LINUX)
        assert parser.get_browser().name == "Firefox"
        assert parser.get_browser().name == "Firefox"
        assert parser.get_result().ua == FIREFOX_LINUX

    def test_repeated_calls_are_identical(self):
        parser = UAParser(SAFARI_IPHONE)
        assert parser.get_result() == parser.get_result()

    def test_no_ua_and_no_provider(self):
        parser = UAParser()
        result = parser.get_result()
        assert result.ua == ""
        assert result.browser.model_dump() == EMPTY_BROWSER
        assert result.cpu.model_dump() == {"architecture": None}
        assert result.device.model_dump() == {"vendor": None, "model": None, "type": None}
        assert result.engine.model_dump() == {"name": None, "version": None}
        assert result.os.model_dump() == {"name": None, "version": None}

    def test_provider_used_when_ua_absent(self):
        parser = UAParser(ua_provider=lambda: FIREFOX_LINUX)
        assert parser.get_ua() == FIREFOX_LINUX

    def test_provider_ignored_when_ua_given(self):
        parser = UAParser(CHROME_WINDOWS, ua_provider=lambda: FIREFOX_LINUX)
        assert parser.get_ua() == CHROME_WINDOWS

    def test_provider_returning_nothing(self):
        assert UAParser(ua_provider=lambda: None).get_ua() == ""

    def test_non_string_ua_treated_as_empty(self):
        assert UAParser(42).get_ua() == ""

    def test_long_ua_truncated(self):
        parser = UAParser("a" * 600)
        assert len(parser.get_ua()) == 500
        assert len(UAParser("a" * 600, max_length=20).get_ua()) == 20

    def test_custom_rules_table(self):
        rules = {Category.BROWSER: ruleset([r"(custom)/(\d+)"], [Field.NAME, Field.VERSION])}
        parser = UAParser("Custom/7", rules=rules)
        assert parser.get_browser() == BrowserInfo(name="Custom", version="7", major="7")
        assert parser.get_os().name is None

    def test_prepend_keeps_defaults_reachable(self):
        extension = {"browser": ruleset([r"(custom)/(\d+)"], [Field.NAME, Field.VERSION])}
        parser = UAParser(CHROME_WINDOWS, extension, prepend=True)
        assert parser.get_browser().name == "Chrome"
        assert parser.set_ua("Custom/7").get_browser().name == "Custom"

    def test_extensions_applied_over_custom_rules(self):
        extension = [{"browser": ruleset([r"(wget)/([\w.]+)"], [Field.NAME, Field.VERSION])}]
        parser = UAParser("Wget/1.0", extension, rules={})
        assert parser.get_browser() == BrowserInfo(name="Wget", version="1.0", major="1")

    def test_extensions_prepended_to_custom_rules(self):
        rules = {Category.BROWSER: ruleset([r"(custom)/(\d+)"], [Field.NAME, Field.VERSION])}
        extension = {"browser": ruleset([r"(wget)/([\w.]+)"], [Field.NAME, Field.VERSION])}
        parser = UAParser("Custom/7", extension, prepend=True, rules=rules)
        assert parser.get_browser().name == "Custom"
        assert parser.set_ua("Wget/1.0").get_browser().name == "Wget"

    def test_replace_drops_defaults(self):
        extension = {"browser": ruleset([r"(custom)/(\d+)"], [Field.NAME, Field.VERSION])}
        parser = UAParser(CHROME_WINDOWS, extension)
        assert parser.get_browser().model_dump() == EMPTY_BROWSER
        assert parser.get_os().name == "Windows"


class TestResults:
    def test_result_is_frozen(self):
        result = parse(CHROME_WINDOWS)
        with pytest.raises(Exception):
            result.ua = "changed"
        with pytest.raises(Exception):
            result.browser.name = "changed"

    def test_str(self):
        result = parse(CHROME_WINDOWS)
        assert str(result.browser) == "Chrome 120.0.0.0"
        assert str(result.os) == "Windows 10"
        assert str(parse("").browser) == ""

    def test_parse_returns_snapshot(self):
        assert isinstance(parse(CHROME_WINDOWS), ParseResult)
