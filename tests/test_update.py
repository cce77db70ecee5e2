"""Tests for the explicit release-feed check."""

import httpx
import pytest

from passmgr.utils.update import UpdateCheckError, check_for_update, parse_version

FEED = "https://updates.example.test/releases/latest"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestParseVersion:
    @pytest.mark.parametrize("text,expected", [
        ("1.2.3", (1, 2, 3)),
        ("v0.10.0", (0, 10, 0)),
        ("2.0.0-rc1", (2, 0, 0)),
        ("7", (7,)),
    ])
    def test_parse(self, text, expected):
        assert parse_version(text) == expected

    def test_garbage(self):
        with pytest.raises(UpdateCheckError):
            parse_version("latest")


class TestCheckForUpdate:
    def test_newer_release(self):
        client = _client(lambda request: httpx.Response(200, json={"tag_name": "v0.2.0"}))
        status = check_for_update("0.1.0", FEED, client=client)
        assert status.update_available is True
        assert status.latest == "0.2.0"
        assert status.current == "0.1.0"

    def test_same_release(self):
        client = _client(lambda request: httpx.Response(200, json={"tag_name": "v0.1.0"}))
        assert check_for_update("0.1.0", FEED, client=client).update_available is False

    def test_older_release(self):
        client = _client(lambda request: httpx.Response(200, json={"tag_name": "0.0.9"}))
        assert check_for_update("0.1.0", FEED, client=client).update_available is False

    def test_padded_versions_compare_equal(self):
        client = _client(lambda request: httpx.Response(200, json={"tag_name": "1.0"}))
        assert check_for_update("1.0.0", FEED, client=client).update_available is False

    def test_requests_feed_url(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"tag_name": "0.1.0"})

        check_for_update("0.1.0", FEED, client=_client(handler))
        assert seen == [FEED]

    def test_http_error(self):
        client = _client(lambda request: httpx.Response(503))
        with pytest.raises(UpdateCheckError, match="Update check failed"):
            check_for_update("0.1.0", FEED, client=client)

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpdateCheckError):
            check_for_update("0.1.0", FEED, client=_client(handler))

    def test_invalid_json(self):
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(UpdateCheckError, match="invalid JSON"):
            check_for_update("0.1.0", FEED, client=client)

    @pytest.mark.parametrize("payload", [[], {}, {"tag_name": 3}])
    def test_missing_tag(self, payload):
        client = _client(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(UpdateCheckError, match="tag_name"):
            check_for_update("0.1.0", FEED, client=client)
