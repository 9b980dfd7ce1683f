from unittest.mock import patch

import pytest
import requests
import responses

from sniffnet.formatted_strings import APP_VERSION
from sniffnet.updates import (
    RELEASES_URL,
    UpdateCheckError,
    check_for_updates,
    is_newer_release_available,
    parse_release_name,
)


def test_parse_older_release():
    assert parse_release_name("v0.0.1") is False


def test_parse_newer_release():
    assert parse_release_name("v9.9.9") is True


def test_parse_same_release():
    assert parse_release_name(f"v{APP_VERSION}") is False


def test_parse_trims_whitespace():
    assert parse_release_name("  v9.0.0\n") is True


@pytest.mark.parametrize("name", ["1.2.3", "v10.0.0", "v1.2", "vx.y.z", ":-(", ""])
def test_parse_rejects_bad_names(name):
    with pytest.raises(UpdateCheckError, match="Cannot parse latest version name"):
        parse_release_name(name)


def test_fetch_latest_release():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASES_URL, json={"name": "v1.1.2"})
        assert is_newer_release_available(6, 2) is False
        request = rsps.calls[0].request
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_newer_release_found():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASES_URL, json={"name": "v9.9.9"})
        assert check_for_updates() is True


def test_malformed_body_is_an_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASES_URL, json={"message": "Not Found"}, status=404)
        with pytest.raises(UpdateCheckError, match=":-\\("):
            is_newer_release_available(1, 0)


def test_retries_then_fails():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASES_URL, body=requests.ConnectionError("down"))
        with patch("sniffnet.updates.time.sleep") as sleep:
            with pytest.raises(UpdateCheckError, match="down"):
                is_newer_release_available(3, 7)
        assert len(rsps.calls) == 3
    assert sleep.call_count == 2
    sleep.assert_called_with(7)


def test_retry_recovers():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, RELEASES_URL, body=requests.ConnectionError("down"))
        rsps.add(responses.GET, RELEASES_URL, json={"name": "v9.0.0"})
        with patch("sniffnet.updates.time.sleep"):
            assert is_newer_release_available(2, 1) is True
        assert len(rsps.calls) == 2


def test_zero_retries_rejected():
    with pytest.raises(ValueError):
        is_newer_release_available(0, 1)