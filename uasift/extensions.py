# uasift/extensions.py

from types import MappingProxyType
from typing import Iterable, List
from uasift.merger import Extension, combine_extensions
from uasift.rules import BrowserType, Category, DeviceType, Field, ruleset

NAME = Field.NAME
VERSION = Field.VERSION
TYPE = Field.TYPE
VENDOR = Field.VENDOR


class UnknownExtensionError(KeyError):
    """Raised when an extension bundle is requested by a name that does not exist"""


CLIS = MappingProxyType({
    Category.BROWSER: ruleset(
        [r"(wget|curl|lynx|elinks|httpie|links|w3m)[/(]? ?([\w.-]+)"], [NAME, VERSION, (TYPE, BrowserType.CLI)],
        [r"\b(?:windows)?(powershell)/([\w.]+)"], [(NAME, {"powershell": "PowerShell"}), VERSION, (TYPE, BrowserType.CLI)],
    ),
})

CRAWLERS = MappingProxyType({
    Category.BROWSER: ruleset(
        [
            r"((?:ahrefs|amazon|bing|cc|dot|duckduck|exa|facebook|gpt|mj12|mojeek|oai-search|perplexity|semrush|seznam)bot)/([\w.]+)",
            r"(ai2bot|applebot(?:-extended)?|bytespider|claude(?:bot|-web)|google-extended|meta-externalagent|petalbot|yandexbot|baiduspider|yeti)/?([\w.]*)",
            r"(google(?:bot|other|-inspectiontool)(?:-image|-video|-news)?|storebot-google)/?([\w.]*)",
            r"(anthropic-ai|cohere-ai|ia_archiver|archive\.org_bot)[/ ]?([\w.]*)",
        ],
        [NAME, VERSION, (TYPE, BrowserType.CRAWLER)],
    ),
})

EMAILS = MappingProxyType({
    Category.BROWSER: ruleset(
        [r"(microsoft outlook|thunderbird|airmail|bluemail|emclient|evolution|foxmail|kmail2?|kontact|spicebird|sylpheed|navermailapp)[/ ]([\w.]+)"],
        [NAME, VERSION, (TYPE, BrowserType.EMAIL)],
    ),
})

FETCHERS = MappingProxyType({
    Category.BROWSER: ruleset(
        [r"(bluesky) cardyb/([\w.]+)"], [(NAME, {"bluesky": "Bluesky"}), VERSION, (TYPE, BrowserType.FETCHER)],
        [
            r"(facebookexternalhit|facebookcatalog|meta-externalfetcher|slackbot-linkexpanding|slack-imgproxy|discordbot|telegrambot|twitterbot|linkedinbot|pinterestbot|skypeuripreview|whatsapp|vkshare|redditbot|embedly|iframely|chatgpt-user|perplexity-user|claude-user)/?([\w.]*)",
        ],
        [NAME, VERSION, (TYPE, BrowserType.FETCHER)],
    ),
    Category.OS: ruleset(
        [r"whatsapp/[\d.]+ ([ai])\b"], [(NAME, {"a": "Android", "i": "iOS"})],
    ),
})

INAPPS = MappingProxyType({
    Category.BROWSER: ruleset(
        [r"\b(line)/([\w.]+)/iab"], [(NAME, {"line": "Line"}), VERSION, (TYPE, BrowserType.INAPP)],
        [r"\[(?:fban/fbios|fb_iab/fb4a).+?fbav/([\w.]+)", r"\[(?:fban/fbios|fb_iab/fb4a)"],
        [VERSION, (NAME, "Facebook"), (TYPE, BrowserType.INAPP)],
        [r"\b(instagram|snapchat|tiktok|musical_ly|kakaotalk|naver|daum|alipayclient|micromessenger)[/ ]([-\w.]+)"],
        [
            (NAME, {
                "instagram": "Instagram",
                "snapchat": "Snapchat",
                "tiktok": "TikTok",
                "musical_ly": "TikTok",
                "kakaotalk": "KakaoTalk",
                "naver": "Naver",
                "daum": "Daum",
                "alipayclient": "Alipay",
                "micromessenger": "WeChat",
            }),
            VERSION,
            (TYPE, BrowserType.INAPP),
        ],
    ),
})

LIBRARIES = MappingProxyType({
    Category.BROWSER: ruleset(
        [
            r"\b(axios|jsdom|scrapy|python-requests|python-urllib3?|aiohttp|httpx|okhttp|go-http-client|node-fetch|undici|superagent|guzzlehttp|libwww-perl|php-soap|java|apache-httpclient|rest-client|faraday|dart|postmanruntime|insomnia)/([\w.]+)",
        ],
        [NAME, VERSION, (TYPE, BrowserType.LIBRARY)],
    ),
})

VEHICLES = MappingProxyType({
    Category.BROWSER: ruleset(
        [r"\bqtcarbrowser\b"], [(NAME, "QtCarBrowser"), (TYPE, BrowserType.VEHICLE)],
    ),
    Category.DEVICE: ruleset(
        [r"\baftlbt962e2\b"], [(VENDOR, "BMW"), (TYPE, DeviceType.EMBEDDED)],
        [r"dilink.+?(byd) auto"], [(VENDOR, {"byd": "BYD"}), (TYPE, DeviceType.EMBEDDED)],
        [r"\b(tesla)(?: qtcarbrowser|/[-\w.]+)"], [(VENDOR, {"tesla": "Tesla"}), (TYPE, DeviceType.EMBEDDED)],
        [r"\b(rivian|polestar|volvo)\b"], [(VENDOR, {"rivian": "Rivian", "polestar": "Polestar", "volvo": "Volvo"}), (TYPE, DeviceType.EMBEDDED)],
    ),
})

# Everything that is not a person behind a browser
BOTS = MappingProxyType(combine_extensions([CRAWLERS, CLIS, FETCHERS, LIBRARIES]))

EXTENSIONS = MappingProxyType({
    "bots": BOTS,
    "clis": CLIS,
    "crawlers": CRAWLERS,
    "emails": EMAILS,
    "fetchers": FETCHERS,
    "inapps": INAPPS,
    "libraries": LIBRARIES,
    "vehicles": VEHICLES,
})


def get_extension(name: str) -> Extension:
    """Look up one bundle by (case-insensitive) name"""
    try:
        return EXTENSIONS[name.strip().lower()]
    except KeyError:
        raise UnknownExtensionError(name) from None


def get_extensions(names: Iterable[str]) -> List[Extension]:
    return [get_extension(name) for name in names]
