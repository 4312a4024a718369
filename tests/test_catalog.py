from unittest.mock import MagicMock, patch

import httpx
import pytest

from getnf.catalog import build_headers, fetch_json, latest_release_tag, list_catalog
from getnf.errors import NetworkError, ParseError


def _response(payload: object) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload
    return response


class TestBuildHeaders:
    @patch("getnf.catalog.config.default_github_token", "")
    def test_user_agent_always_sent(self) -> None:
        headers = build_headers()

        assert headers["User-Agent"] == "getnf"
        assert headers["Accept"] == "application/vnd.github+json"
        assert "Authorization" not in headers

    @patch("getnf.catalog.config.default_github_token", "secret")
    def test_token_adds_authorization(self) -> None:
        headers = build_headers()

        assert headers["Authorization"] == "Bearer secret"
        assert headers["User-Agent"] == "getnf"


class TestFetchJson:
    @patch("getnf.catalog.httpx.get")
    def test_sends_user_agent(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"ok": True})

        assert fetch_json("https://api.example/x") == {"ok": True}

        _, kwargs = mock_get.call_args
        assert kwargs["headers"]["User-Agent"] == "getnf"
        assert kwargs["follow_redirects"] is True

    @patch("getnf.catalog.httpx.get")
    def test_transport_error(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(NetworkError, match="Could not reach"):
            fetch_json("https://api.example/x")

    @patch("getnf.catalog.httpx.get")
    def test_http_status_error(self, mock_get: MagicMock) -> None:
        request = httpx.Request("GET", "https://api.example/x")
        response = httpx.Response(403, request=request)
        mock_get.return_value = response

        with pytest.raises(NetworkError, match="HTTP 403"):
            fetch_json("https://api.example/x")

    @patch("getnf.catalog.httpx.get")
    def test_invalid_json(self, mock_get: MagicMock) -> None:
        response = _response(None)
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(ParseError, match="Invalid JSON"):
            fetch_json("https://api.example/x")


class TestLatestReleaseTag:
    @patch("getnf.catalog.config.default_repo", "ryanoasis/nerd-fonts")
    @patch("getnf.catalog.httpx.get")
    def test_latest_release_tag(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": "v3.2.1", "name": "v3.2.1"})

        assert latest_release_tag() == "v3.2.1"

        mock_get.assert_called_once()
        assert (
            mock_get.call_args[0][0]
            == "https://api.github.com/repos/ryanoasis/nerd-fonts/releases/latest"
        )

    @patch("getnf.catalog.httpx.get")
    def test_missing_tag(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"name": "v3.2.1"})

        with pytest.raises(ParseError, match="tag_name"):
            latest_release_tag()

    @patch("getnf.catalog.httpx.get")
    def test_tag_not_a_string(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": 3})

        with pytest.raises(ParseError):
            latest_release_tag()

    @patch("getnf.catalog.httpx.get")
    def test_not_an_object(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response(["v3.2.1"])

        with pytest.raises(ParseError):
            latest_release_tag()

    @patch("getnf.catalog.httpx.get")
    def test_network_error(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(NetworkError):
            latest_release_tag()


class TestListCatalog:
    @patch("getnf.catalog.config.default_repo", "ryanoasis/nerd-fonts")
    @patch("getnf.catalog.httpx.get")
    def test_list_catalog(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response([{"name": "FiraCode"}, {"name": "Hack"}])

        assert list_catalog() == ["FiraCode", "Hack"]
        assert mock_get.call_args[0][0] == (
            "https://api.github.com/repos/ryanoasis/nerd-fonts"
            "/contents/patched-fonts?ref=master"
        )

    @patch("getnf.catalog.httpx.get")
    def test_preserves_response_order(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response(
            [
                {"name": "Hack", "type": "dir"},
                {"name": "3270", "type": "dir"},
                {"name": "FiraCode", "type": "dir"},
            ]
        )

        assert list_catalog() == ["Hack", "3270", "FiraCode"]

    @patch("getnf.catalog.httpx.get")
    def test_empty_listing(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response([])

        assert list_catalog() == []

    @patch("getnf.catalog.httpx.get")
    def test_entry_without_name(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response([{"name": "Hack"}, {"path": "x"}])

        with pytest.raises(ParseError, match="without a name"):
            list_catalog()

    @patch("getnf.catalog.httpx.get")
    def test_malformed_entry(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response(["Hack"])

        with pytest.raises(ParseError, match="malformed"):
            list_catalog()

    @patch("getnf.catalog.httpx.get")
    def test_not_a_listing(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"message": "Not Found"})

        with pytest.raises(ParseError):
            list_catalog()
