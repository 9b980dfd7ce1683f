from urllib.parse import urlparse

import pytest

from sniffnet.web_page import WebPage


@pytest.mark.parametrize("page", [WebPage.REPO, WebPage.WEBSITE_DOWNLOAD])
def test_urls_are_https(page):
    parsed = urlparse(WebPage.url(page))
    assert parsed.scheme == "https"
    assert parsed.netloc


def test_urls_are_distinct():
    urls = {WebPage.url(page) for page in WebPage}
    assert len(urls) == len(list(WebPage))
    assert WebPage.REPO.url() != WebPage.WEBSITE_DOWNLOAD.url()


def test_download_page_path():
    assert urlparse(WebPage.WEBSITE_DOWNLOAD.url()).path == "/download/"


def test_repository_is_hosted_on_github():
    assert urlparse(WebPage.REPO.url()).netloc == "github.com"