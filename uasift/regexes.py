# uasift/regexes.py

from types import MappingProxyType
from uasift.rules import Category, DeviceType, Field, ruleset

NAME = Field.NAME
VERSION = Field.VERSION
TYPE = Field.TYPE
VENDOR = Field.VENDOR
MODEL = Field.MODEL
ARCHITECTURE = Field.ARCHITECTURE

CONSOLE = DeviceType.CONSOLE
MOBILE = DeviceType.MOBILE
SMARTTV = DeviceType.SMARTTV
TABLET = DeviceType.TABLET
WEARABLE = DeviceType.WEARABLE
XR = DeviceType.XR


# ---------------------------------------------------------------------------
# Canonical names (keys are matched case-insensitively)
# ---------------------------------------------------------------------------

BROWSER_NAMES = {
    "samsungbrowser": "Samsung Internet",
    "yabrowser": "Yandex",
    "ucbrowser": "UCBrowser",
    "headlesschrome": "Chrome Headless",
    "opera mini": "Opera Mini",
    "opera mobi": "Opera Mobi",
    "ie": "IE",
    "iemobile": "IEMobile",
    "mobile safari": "Mobile Safari",
    "mobilesafari": "Mobile Safari",
    "duckduckgo": "DuckDuckGo",
    "vivaldi": "Vivaldi",
    "silk": "Silk",
}

WINDOWS_VERSIONS = {
    "nt3.51": "NT 3.11",
    "nt 4.0": "NT4.0",
    "nt 5.0": "2000",
    "nt 5.1": "XP",
    "nt 5.2": "XP",
    "nt 6.0": "Vista",
    "nt 6.1": "7",
    "nt 6.2": "8",
    "nt 6.3": "8.1",
    "nt 6.4": "10",
    "nt 10.0": "10",
    "arm": "RT",
    "4.90": "ME",
}

OS_NAMES = {
    "mac os x": "macOS",
    "macos": "macOS",
    "macintosh": "macOS",
    "mac_powerpc": "macOS",
    "cros": "Chrome OS",
    "sunos": "Solaris",
    "rim tablet os": "RIM Tablet OS",
    "webos": "webOS",
    "openharmony": "OpenHarmony",
}

DEVICE_VENDORS = {
    "lge": "LG",
    "lg electronics": "LG",
    "lg": "LG",
    "hbo": "HBO",
    "oneplus": "OnePlus",
    "samsung": "Samsung",
    "roku": "Roku",
    "sony": "Sony",
    "nintendo": "Nintendo",
    "philips": "Philips",
    "panasonic": "Panasonic",
    "sharp": "Sharp",
    "tcl": "TCL",
    "hisense": "Hisense",
    "vizio": "Vizio",
}

CPU_ARCHITECTURES = {
    "powerpc": "ppc",
    "powerpc64": "ppc64",
}


# ---------------------------------------------------------------------------
# Default rule tables - order is precedence, first match wins
# ---------------------------------------------------------------------------

BROWSER_RULES = ruleset(
    # Chromium derivatives before Chrome
    [r"\bedg(?:e|a|ios)?/([\w.]+)"], [VERSION, (NAME, "Edge")],
    [r"\bopr/([\w.]+)"], [VERSION, (NAME, "Opera")],
    [r"(opera mini)/([-\w.]+)", r"(opera mobi)/.+? version/([\w.]+)"], [(NAME, BROWSER_NAMES), VERSION],
    [r"(opera)(?:.+version/|[/ ]+)([\w.]+)"], [NAME, VERSION],
    [r"(samsungbrowser|yabrowser|ucbrowser|vivaldi|duckduckgo|silk)/v?([\w.]+)"], [(NAME, BROWSER_NAMES), VERSION],
    [r"(headlesschrome)(?:/([\w.]+)| )"], [(NAME, BROWSER_NAMES), VERSION],
    [r" wv\).+?chrome/([\w.]+)"], [VERSION, (NAME, "Chrome WebView")],
    [r"\bcrios/([\w.]+)"], [VERSION, (NAME, "Chrome")],
    [r"\bfxios/([-\w.]+)"], [VERSION, (NAME, "Firefox")],
    [r"(chrome|chromium)/v?([\w.]+)"], [NAME, VERSION],

    # Internet Explorer
    [r"(?:ms|\()(ie) ([\w.]+)", r"(iemobile)(?:browser)?[/ ]?([\w.]*)"], [(NAME, BROWSER_NAMES), VERSION],
    [r"trident.+?rv[: ]([\w.]{1,9})\b.+?like gecko"], [VERSION, (NAME, "IE")],

    # Safari
    [r"version/([\w.,]+) .*?mobile/\w+ safari"], [VERSION, (NAME, "Mobile Safari")],
    [r"version/([\w.,]+) .*?(mobile ?safari|safari)"], [VERSION, (NAME, BROWSER_NAMES)],

    # Gecko family
    [r"(firefox focus|klar)/([\w.]+)"], [(NAME, {"klar": "Firefox Focus"}), VERSION],
    [r"(firefox|seamonkey|waterfox|iceweasel|palemoon|camino|icecat)/([-\w.]+)"], [NAME, VERSION],

    # Legacy
    [r"(netscape)\d?/([-\w.]+)", r"(konqueror)/([-\w.]+)"], [NAME, VERSION],
)

CPU_RULES = ruleset(
    [r"\b(?:amd|x|x86[-_]?|wow|win)64\b"], [(ARCHITECTURE, "amd64")],
    [r"\b(?:ia32(?=;)|(?:i[346]|x)86)\b"], [(ARCHITECTURE, "ia32")],
    [r"\b(?:aarch64|arm(?:v?8e?l?|_?64))\b"], [(ARCHITECTURE, "arm64")],
    [r"\barm(?:v[67])?ht?n?[fl]p?\b"], [(ARCHITECTURE, "armhf")],
    [r"\b((?:ppc|powerpc)(?:64)?)(?: mac|;|\))"], [(ARCHITECTURE, CPU_ARCHITECTURES)],
    [r"\b(?:sun4\w)[;)]"], [(ARCHITECTURE, "sparc")],
    [r"\b(avr32|ia64(?=;)|68k(?=\))|arm(?=v[1-7]|;|eabi)|mips(?:64)?|sparc(?:64)?|pa-risc)\b"], [(ARCHITECTURE, str.lower)],
)

DEVICE_RULES = ruleset(
    # Apple
    [r"\((ipad);[-\w),; ]+apple", r"\b(ipad)\d\d?,\d\d?[;\]]", r"\b(ipad)\b"], [MODEL, (VENDOR, "Apple"), (TYPE, TABLET)],
    [r"\((ip(?:hone|od)[\w ]*);", r"\b(iphone)\b"], [MODEL, (VENDOR, "Apple"), (TYPE, MOBILE)],
    [r"(apple ?watch|watch os)[,/ ]?[\d.]*"], [(MODEL, "Apple Watch"), (VENDOR, "Apple"), (TYPE, WEARABLE)],
    [r"\b(apple ?tv)\b"], [(MODEL, "Apple TV"), (VENDOR, "Apple"), (TYPE, SMARTTV)],
    [r"(macintosh);"], [MODEL, (VENDOR, "Apple")],

    # Consoles
    [r"(playstation \w+)"], [MODEL, (VENDOR, "Sony"), (TYPE, CONSOLE)],
    [r"\b(xbox(?: one| series [sx])?)[); ]"], [MODEL, (VENDOR, "Microsoft"), (TYPE, CONSOLE)],
    [r"(nintendo) (switch|wiiu|wii|3ds|ds)\b"], [(VENDOR, DEVICE_VENDORS), MODEL, (TYPE, CONSOLE)],

    # XR
    [r"\b(quest(?: \d| pro)?)\b"], [MODEL, (VENDOR, "Facebook"), (TYPE, XR)],

    # Smart TVs
    [r"\b(roku)[\dx]*[)/]((?:dvp-)?[\d.]*)"], [(VENDOR, DEVICE_VENDORS), MODEL, (TYPE, SMARTTV)],
    [r"hbbtv/\d+\.\d+\.\d+ +\([\w+ ]*; *(\w[^;]*);([^;]*)"], [(VENDOR, DEVICE_VENDORS), MODEL, (TYPE, SMARTTV)],
    [r"smart-tv.+?(samsung)", r"\b(lg)[\w ]{0,8}netcast", r"\b(lge?)(?:netcast|smarttv)"], [(VENDOR, DEVICE_VENDORS), (TYPE, SMARTTV)],
    [r"\b(?:android tv|smart[- ]?tv|googletv|crkey)\b"], [(TYPE, SMARTTV)],

    # Samsung
    [r"\b(sch-i[89]0\d|shw-m380s|sm-[ptx]\w{2,4}|gt-[pn]\d{2,4}|sgh-t8[56]9|nexus 10)"], [MODEL, (VENDOR, "Samsung"), (TYPE, TABLET)],
    [r"\b((?:s[cgp]h|gt|sm)-(?![lr])\w+|sc[g-]?\d+a?|galaxy nexus)"], [MODEL, (VENDOR, "Samsung"), (TYPE, MOBILE)],

    # Google
    [r"\b(pixel c)\b"], [MODEL, (VENDOR, "Google"), (TYPE, TABLET)],
    [r"droid.+; (pixel[\daxl ]{0,6})(?: bui|\))"], [MODEL, (VENDOR, "Google"), (TYPE, MOBILE)],

    # Xiaomi
    [r"\b(redmi[-_ ]?(?:note|k)?[\w ]+?)(?: bui|\))", r"\b(poco[\w ]+?|m2\d{3}j\d\d[a-z]{2})(?: bui|\))"],
    [(MODEL, (r"_", " ")), (VENDOR, "Xiaomi"), (TYPE, MOBILE)],

    # Huawei / Honor
    [r"\b((?:ag[rs][23]|bah2?|sht?|btv)-a?[lw]\d{2})\b"], [MODEL, (VENDOR, "Huawei"), (TYPE, TABLET)],
    [r"(?:huawei|honor)([-\w ]+)[;)]", r"\b(nexus 6p|\w{2,4}e?-[atu]?[ln][\dx][012359c][adn]?)\b"], [MODEL, (VENDOR, "Huawei"), (TYPE, MOBILE)],

    # OnePlus
    [r"\b(oneplus)[-_ ]?(a\d0\d\d)(?: b|\))"], [(VENDOR, DEVICE_VENDORS), MODEL, (TYPE, MOBILE)],

    # Generic form factors
    [r"\b(?:tablet|tab)[;/]", r"\bkindle\b"], [(TYPE, TABLET)],
    [r"(?:phone|mobile(?:[;/]| safari)|pda(?=.+?windows ce))"], [(TYPE, MOBILE)],
    [r"droid .+?; ([\w. -]+)(?: build|\) applewebkit)"], [MODEL, (TYPE, MOBILE)],
)

ENGINE_RULES = ruleset(
    [r"windows.+? edge/([\w.]+)"], [VERSION, (NAME, "EdgeHTML")],
    [r"webkit/537\.36.+?chrome/(?!27)([\w.]+)"], [VERSION, (NAME, "Blink")],
    [r"(presto)/([\w.]+)", r"(webkit|trident|netfront|netsurf|amaya|lynx|w3m|goanna|servo)/([\w.]+)", r"(khtml|tasman|links)[/ ]\(?([\w.]+)"],
    [NAME, VERSION],
    [r"rv:([\w.]{1,9})\b.+?(gecko)"], [VERSION, NAME],
)

OS_RULES = ruleset(
    # Windows
    [r"microsoft (windows) (vista|xp)"], [NAME, VERSION],
    [r"(windows (?:phone(?: os)?|mobile|iot))[/ ]?([\d.\w ]*)"], [NAME, VERSION],
    [r"windows nt 6\.2; (arm)"], [(VERSION, WINDOWS_VERSIONS), (NAME, "Windows")],
    [r"(windows)[/ ]?([ntce\d. ]+\w)", r"(win(?=3|9|n)|win 9x )([nt\d.]+)"], [(NAME, {"win": "Windows", "win 9x": "Windows"}), (VERSION, WINDOWS_VERSIONS)],

    # Apple - iOS before macOS, iOS user-agents say "like Mac OS X"
    [r"ip[honead]{2,4}\b(?:.*os ([\w]+) like mac|; opera)", r"(?:ios;fbsv/|iphone.*?ios[ /])([\d.]+)"], [VERSION, (NAME, "iOS")],
    [r"\b(?:watch ?os)[/ ]([\w.]+)"], [VERSION, (NAME, "watchOS")],
    [r"(mac os x) ?([\w. ]*)", r"(macintosh|mac_powerpc\b)"], [(NAME, OS_NAMES), VERSION],

    # Mobile
    [r"(android|webos|qnx|bada|rim tablet os|maemo|meego|sailfish|openharmony)[-/ ]?([\w.]*)"], [(NAME, OS_NAMES), VERSION],
    [r"(blackberry)\w*/([\w.]*)"], [(NAME, {"blackberry": "BlackBerry"}), VERSION],
    [r"\b(?:hpw|web)os/([\d.]+)"], [VERSION, (NAME, "webOS")],
    [r"(tizen|kaios)[/ ]([\w.]+)"], [NAME, VERSION],

    # Desktop
    [r"(cros) [\w]+(?:\)| ([\w.]+)\b)"], [(NAME, OS_NAMES), VERSION],
    [r"(ubuntu|debian|fedora|mint|gentoo|arch linux|centos|suse|slackware|kubuntu|manjaro)(?: enterprise)?(?:[-/ ]linux)?(?:[-/ ](?!chrom|package))?([-\w.]*)"], [NAME, VERSION],
    [r"(linux) ?([\w.]*)"], [NAME, VERSION],
    [r"(sunos) ?([\w.]*)"], [(NAME, OS_NAMES), VERSION],
    [r"\b((?:free|open|net)bsd|dragonfly)[/ ]?(?!amd|[ix346]{1,2}86)([\w.]*)"], [NAME, VERSION],
    [r"(haiku) ?(r\d)?"], [NAME, VERSION],
)

DEFAULT_RULES = MappingProxyType({
    Category.BROWSER: BROWSER_RULES,
    Category.CPU: CPU_RULES,
    Category.DEVICE: DEVICE_RULES,
    Category.ENGINE: ENGINE_RULES,
    Category.OS: OS_RULES,
})
