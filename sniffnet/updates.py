"""Check whether a newer release of the application has been published."""

from __future__ import annotations

import time

import requests

from sniffnet.formatted_strings import APP_VERSION

RELEASES_URL = "https://api.github.com/repos/GyulyVGC/Sniffnet/releases/latest"

_HEADERS = {
    "User-agent": "GyulyVGC",
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}

_UNPARSABLE_NAME = ":-("


class UpdateCheckError(Exception):
    """Raised when the latest release cannot be fetched or understood."""


def parse_release_name(name: str) -> bool:
    """Return whether the release named ``name`` (such as ``v1.1.2``) is newer than this one."""
    version = name.strip()
    raw = version.encode("utf-8")
    if (
        len(raw) == 6
        and version.startswith("v")
        and chr(raw[1]).isnumeric()
        and chr(raw[2]) == "."
        and chr(raw[3]).isnumeric()
        and chr(raw[4]) == "."
        and chr(raw[5]).isnumeric()
    ):
        return version[1:] > APP_VERSION
    raise UpdateCheckError(f"Cannot parse latest version name {version}")


def _release_name(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return _UNPARSABLE_NAME
    name = data.get("name") if isinstance(data, dict) else None
    return name if isinstance(name, str) else _UNPARSABLE_NAME


def is_newer_release_available(max_retries: int, seconds_between_retries: int) -> bool:
    """Ask for the latest release, retrying failed requests, and compare it with this version."""
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")
    retries_left = max_retries
    while True:
        try:
            response = requests.get(RELEASES_URL, headers=_HEADERS, timeout=30)
        except requests.RequestException as error:
            retries_left -= 1
            if retries_left <= 0:
                raise UpdateCheckError(str(error)) from error
            time.sleep(seconds_between_retries)
            continue
        return parse_release_name(_release_name(response))


def check_for_updates() -> bool:
    """Check for a newer release with the application's standard retry policy."""
    return is_newer_release_available(6, 30)