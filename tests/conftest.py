import pytest

FIREFOX_WINDOWS = "Mozilla/5.0 (Windows NT 10.0; rv:50.0) Gecko/20100101 Firefox/50.0"
CHROME_LINUX = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/116.0 Safari/537.36"
GOOGLEBOT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
YANDEXBOT = "Mozilla/5.0 (compatible; YandexBot/3.0; +http://yandex.com/bots)"


def build_line(ip="10.0.0.1", ts="10/Oct/2023:13:55:36 +0000", method="GET",
               path="/index.html", status=200, size="512", referer="-",
               agent=FIREFOX_WINDOWS):
    return f'{ip} - - [{ts}] "{method} {path} HTTP/1.1" {status} {size} "{referer}" "{agent}"'


@pytest.fixture
def make_line():
    return build_line
