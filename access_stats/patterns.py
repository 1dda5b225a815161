"""Access Stats - Constants and patterns"""

VERSION = "1.0.0"

# Combined log format: ip ident user [time] "METHOD path HTTP/x" status size "referer" "agent"
LOG_PATTERN = (
    r'^(?P<ip>[\d.]+) \S+ \S+ \[(?P<timestamp>.*?)\] '
    r'"(?P<method>\w*) (?P<path>.*?) HTTP/.*?" '
    r'(?P<status>\d+) (?P<size>\S*) '
    r'"(?P<referer>[^"]*)" "(?P<user_agent>[^"]*)"$'
)

TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"
# strptime alone is case-insensitive and also takes "Z" or "+00:00" offsets
TIMESTAMP_PATTERN = r"^\d{2}/[A-Z][a-z]{2}/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4}$"

# Characters that may not appear anywhere in a URI
URI_INVALID_CHARS = r"[\s<>\"{}|\\^`]"

MAX_LINE_LENGTH = 1024

# Any of these (case-insensitive) marks the agent as a bot
BOT_MARKERS = [
    "bot",
    "googlebot",
    "yandexbot",
    "crawler",
    "spider",
    "indexer",
    "scraper",
]

# Tracked separately from the generic bot flag, checked in this order
NAMED_BOTS = [
    ("googlebot", "Googlebot"),
    ("yandexbot", "YandexBot"),
]

# First match wins, order matters: "android" agents usually say "linux" too
OS_FAMILIES = [
    (lambda ua: "windows" in ua, "Windows"),
    (lambda ua: "mac" in ua, "macOS"),
    (lambda ua: "linux" in ua, "Linux"),
    (lambda ua: "android" in ua, "Android"),
    (lambda ua: "ios" in ua, "iOS"),
]

BROWSER_FAMILIES = [
    (lambda ua: "edg/" in ua or "edge/" in ua, "Edge"),
    (lambda ua: "firefox" in ua, "Firefox"),
    (lambda ua: "chrome" in ua and "chromium" not in ua, "Chrome"),
    (lambda ua: "safari" in ua and "chrome" not in ua, "Safari"),
    (lambda ua: "opera" in ua or "opr/" in ua, "Opera"),
]

UNKNOWN_OS = "Unknown"
OTHER_BROWSER = "Other"

# Status codes counted as error requests
ERROR_STATUS_RANGE = range(400, 600)
