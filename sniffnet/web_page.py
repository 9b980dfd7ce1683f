"""Web pages the application can open."""

from __future__ import annotations

from enum import Enum


class WebPage(Enum):
    """The web pages that can be opened from the interface."""

    REPO = "repo"
    WEBSITE_DOWNLOAD = "website_download"

    def url(self) -> str:
        """Return the address of the page."""
        return _URLS[self]


_URLS: dict[WebPage, str] = {
    WebPage.REPO: "https://github.com/sniffnet/sniffnet",
    WebPage.WEBSITE_DOWNLOAD: "https://www.sniffnet.net/download/",
}