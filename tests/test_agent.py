import pytest

from access_stats import AgentInfo, classify_agent, is_bot, named_bot

from conftest import FIREFOX_WINDOWS, CHROME_LINUX, GOOGLEBOT, YANDEXBOT


def test_empty_agent():
    assert classify_agent("") == AgentInfo(is_bot=False, os_family="Unknown", browser_family="Other")


def test_firefox_on_windows():
    info = classify_agent(FIREFOX_WINDOWS)
    assert info == AgentInfo(is_bot=False, os_family="Windows", browser_family="Firefox")


@pytest.mark.parametrize("agent", [
    GOOGLEBOT,
    YANDEXBOT,
    "Mozilla/5.0 (compatible; bingbot/2.0; +http://www.bing.com/bingbot.htm)",
    "Baiduspider/2.0",
    "SiteCrawler 1.1",
    "FastIndexer",
    "price-SCRAPER",
])
def test_bot_markers(agent):
    assert classify_agent(agent).is_bot


@pytest.mark.parametrize("agent", [
    FIREFOX_WINDOWS,
    CHROME_LINUX,
    "curl/8.4.0",
])
def test_not_bot(agent):
    assert not classify_agent(agent).is_bot


@pytest.mark.parametrize("agent, expected", [
    (FIREFOX_WINDOWS, "Windows"),
    ("Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) AppleWebKit/605.1.15 Version/16.6 Safari/605.1.15", "macOS"),
    (CHROME_LINUX, "Linux"),
    ("Dalvik/2.1.0 (U; Android 11; SM-G991B)", "Android"),
    ("MyApp/1.0 (iOS 17.0)", "iOS"),
    ("curl/8.4.0", "Unknown"),
    # "linux" is checked before "android"
    ("Mozilla/5.0 (Linux; Android 13; Pixel 7) Chrome/116.0 Mobile Safari/537.36", "Linux"),
    # "mac" is checked before "ios"
    ("Mozilla/5.0 (iPhone; CPU iPhone OS 16_0 like Mac OS X) Mobile/15E148 Safari/604.1", "macOS"),
])
def test_os_family(agent, expected):
    assert classify_agent(agent).os_family == expected


@pytest.mark.parametrize("agent, expected", [
    ("Mozilla/5.0 (Windows NT 10.0) Chrome/116.0 Safari/537.36 Edg/116.0", "Edge"),
    (FIREFOX_WINDOWS, "Firefox"),
    (CHROME_LINUX, "Chrome"),
    ("Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) Version/16.6 Safari/605.1.15", "Safari"),
    ("Opera/9.80 (Windows NT 6.1) Presto/2.12", "Opera"),
    ("Mozilla/5.0 (X11; Linux x86_64) Chromium/90.0 Chrome/90.0 Safari/537.36", "Other"),
    # Chrome is checked before Opera
    ("Mozilla/5.0 (Windows NT 10.0) Chrome/116.0 Safari/537.36 OPR/102.0", "Chrome"),
    ("Wget/1.21", "Other"),
])
def test_browser_family(agent, expected):
    assert classify_agent(agent).browser_family == expected


def test_named_bot():
    assert named_bot(GOOGLEBOT) == "Googlebot"
    assert named_bot(YANDEXBOT) == "YandexBot"
    assert named_bot("GOOGLEBOT-Image/1.0") == "Googlebot"
    assert named_bot("bingbot/2.0") is None
    assert named_bot("") is None


def test_named_bot_prefers_googlebot():
    assert named_bot("Googlebot YandexBot") == "Googlebot"


def test_is_bot():
    assert is_bot(GOOGLEBOT)
    assert is_bot("SEARCH-SPIDER")
    assert not is_bot(FIREFOX_WINDOWS)
    assert not is_bot("")
